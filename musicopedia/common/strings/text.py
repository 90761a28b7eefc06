from typing import List, Optional


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def is_blank(v: Optional[str]) -> bool:
    """True for None, '' and whitespace-only strings."""
    return v is None or not str(v).strip()
