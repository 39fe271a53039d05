from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from geoapify.client import GeoapifyClient


class Params(BaseModel):
    """Base for endpoint parameter objects. Enum fields hold their wire values."""

    model_config = ConfigDict(frozen=True, use_enum_values=True, validate_default=True)


class Service:
    def __init__(self, client: "GeoapifyClient"):
        self.client = client


def query(*pairs: Tuple[str, Optional[str]]) -> List[Tuple[str, str]]:
    """Keeps the pairs whose value is set, in order."""
    return [(key, value) for key, value in pairs if value not in (None, "")]


def joined(values: Optional[Iterable], sep: str) -> Optional[str]:
    if not values:
        return None
    return sep.join(str(getattr(v, "value", v)) for v in values)


def positive(n: Optional[int]) -> Optional[str]:
    return str(n) if n and n > 0 else None


def fixed(x: float) -> str:
    """Six decimal places, e.g. 47.600000."""
    return "%f" % x


def shortest(x: float) -> str:
    """Shortest round-tripping form without a trailing `.0`, e.g. 47.6 or -122."""
    text = repr(float(x))
    return text[:-2] if text.endswith(".0") else text


def body(**fields) -> dict:
    """JSON body without the unset fields."""
    return {k: v for k, v in fields.items() if v not in (None, "", [], 0)}
