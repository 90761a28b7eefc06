import pytest

from musicopedia.domain.entities.performer import PerformerRequest
from musicopedia.domain.enums import PerformerType
from musicopedia.domain.errors import FactoryDispatchError, PerformerValidationError
from musicopedia.domain.policies.performer_factory import PerformerFactory, SoloPolicy


def _req(type_, **kw) -> PerformerRequest:
    return PerformerRequest(type=type_, **kw)


LONG_DESC = "A virtual idol project run by a game studio with its own lore and cast."


@pytest.fixture()
def factory() -> PerformerFactory:
    return PerformerFactory()


def test_dispatches_to_each_policy(factory):
    cases = [
        _req(PerformerType.solo, name="IU", primary_language="Korean"),
        _req(PerformerType.group, name="BTS", genre="K-pop", description="Seven member boy group"),
        _req(PerformerType.franchise, name="K/DA", description=LONG_DESC, origin_country="US"),
        _req(PerformerType.various, name="Best of 2010s", description="x" * 30, genre="Pop"),
    ]
    for req in cases:
        p = factory.create(req)
        assert p.type is req.type
        assert p.name == req.name
        assert p.id is None


def test_string_tag_is_accepted(factory):
    p = factory.create(_req("solo", name="IU", primary_language="Korean"))
    assert p.type is PerformerType.solo


@pytest.mark.parametrize("tag", [None, "", "Band", "SOLO", 42])
def test_unknown_or_missing_tag_fails_fast(factory, tag):
    with pytest.raises(FactoryDispatchError, match="No factory for performer type"):
        factory.create(_req(tag, name="Anything"))


def test_solo_requires_primary_language(factory):
    with pytest.raises(PerformerValidationError) as ei:
        factory.create(_req(PerformerType.solo, name="X", primary_language=None))
    assert str(ei.value) == "Primary language is required for solo artists"
    assert ei.value.field == "primary_language"


def test_blank_name_rejected_for_every_type(factory):
    for t, label in [
        (PerformerType.solo, "Solo artist name"),
        (PerformerType.group, "Group name"),
        (PerformerType.franchise, "Franchise artist name"),
        (PerformerType.various, "Various artist compilation name"),
    ]:
        with pytest.raises(PerformerValidationError, match=f"{label} cannot be empty"):
            factory.validate(_req(t, name="   "))


@pytest.mark.parametrize(
    "type_,limit",
    [
        (PerformerType.solo, 100),
        (PerformerType.group, 150),
        (PerformerType.franchise, 200),
        (PerformerType.various, 300),
    ],
)
def test_name_length_limits(factory, type_, limit):
    extra = {
        PerformerType.solo: dict(primary_language="Korean"),
        PerformerType.group: dict(genre="Rock", description="A band"),
        PerformerType.franchise: dict(description=LONG_DESC, origin_country="JP"),
        PerformerType.various: dict(description="y" * 40, genre="Jazz"),
    }[type_]
    factory.validate(_req(type_, name="a" * limit, **extra))
    with pytest.raises(PerformerValidationError, match=f"cannot exceed {limit} characters"):
        factory.validate(_req(type_, name="a" * (limit + 1), **extra))


def test_group_requires_genre_then_description(factory):
    with pytest.raises(PerformerValidationError, match="Genre is required for groups") as ei:
        factory.validate(_req(PerformerType.group, name="G", description="d"))
    assert ei.value.field == "genre"
    with pytest.raises(PerformerValidationError, match="Description is required for groups"):
        factory.validate(_req(PerformerType.group, name="G", genre="Rock", description=" "))


def test_franchise_rules(factory):
    with pytest.raises(PerformerValidationError, match=r"minimum 50 characters"):
        factory.validate(_req(PerformerType.franchise, name="F", description="short", origin_country="JP"))
    with pytest.raises(PerformerValidationError, match="Origin country is required for franchise artists"):
        factory.validate(_req(PerformerType.franchise, name="F", description=LONG_DESC))


def test_various_rules(factory):
    with pytest.raises(PerformerValidationError, match=r"minimum 30 characters"):
        factory.validate(_req(PerformerType.various, name="V", description="too short", genre="Pop"))
    with pytest.raises(PerformerValidationError, match="Genre classification is required"):
        factory.validate(_req(PerformerType.various, name="V", description="z" * 30))


def test_build_has_no_side_effects_and_keeps_type(factory):
    req = _req(PerformerType.group, name="G", genre="Rock", description="d", external_id="abc")
    a, b = factory.build(req), factory.build(req)
    assert a is not b
    assert a == b
    assert a.type is PerformerType.group
    assert a.external_id == "abc"


def test_duplicate_policies_rejected():
    with pytest.raises(ValueError, match="Duplicate policy"):
        PerformerFactory([SoloPolicy(), SoloPolicy()])


def test_restricted_factory_only_knows_its_policies():
    f = PerformerFactory([SoloPolicy()])
    assert f.supported_types == (PerformerType.solo,)
    with pytest.raises(FactoryDispatchError):
        f.policy_for(PerformerType.group)
