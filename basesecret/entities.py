# ----- entities.py -----
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union
import config
from basesecret.decoder import decode, validate_base
from basesecret.errors import MalformedRequest

class Point(NamedTuple):
    x: int
    y: int

@dataclass(frozen=True)
class Share:
    """
    One share as supplied by the caller: the x-coordinate and the
    y-coordinate written in some base between 2 and 36.

    Base and value are kept as received and only checked by to_point, so a
    share that is never decoded cannot fail a request.
    """
    index: int
    base: Union[int, str, None]
    encoded_value: Optional[str]

    def __post_init__(self):
        if self.index < 1:
            raise MalformedRequest(f"Share index must be positive, got {self.index}")

    def to_point(self) -> Point:
        if self.base is None or self.encoded_value is None:
            raise MalformedRequest(f"Share {self.index} must contain 'base' and 'value'")
        if not isinstance(self.encoded_value, str):
            raise MalformedRequest(f"Share {self.index} value must be a string")
        base = validate_base(_parse_int(self.base, "base"))
        return Point(self.index, decode(self.encoded_value, base))

@dataclass(frozen=True)
class ReconstructionRequest:
    k: int
    n: int
    shares: Tuple[Share, ...]

@dataclass(frozen=True)
class ReconstructionResult:
    secret: int
    points_used: int
    k: int
    n: int

    def to_dict(self):
        return {
            "success": True,
            "secret": str(self.secret),
            "pointsUsed": self.points_used,
            "k": self.k,
            "n": self.n
        }

def _parse_int(value, field):
    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    raise MalformedRequest(f"Field '{field}' must be a non-negative integer, got {value!r}")

def parse_request(json_data) -> ReconstructionRequest:
    """
    Turns the JSON request body into a ReconstructionRequest.

    The body carries a metadata entry {"keys": {"k": ..., "n": ...}} and one
    entry per share keyed by its decimal index: {"<index>": {"base": ...,
    "value": ...}}. Shares come back ordered by ascending index.
    """
    if not isinstance(json_data, Mapping):
        raise MalformedRequest("Request body must be a JSON object")

    keys = json_data.get(config.Config.METADATA_KEY)
    if not isinstance(keys, Mapping) or "k" not in keys or "n" not in keys:
        raise MalformedRequest(
            f"Request must contain '{config.Config.METADATA_KEY}' with 'k' and 'n'"
        )
    k = _parse_int(keys["k"], "k")
    n = _parse_int(keys["n"], "n")

    shares = []
    for key, entry in json_data.items():
        if key == config.Config.METADATA_KEY:
            continue
        index = _parse_int(key, "share index")
        if not isinstance(entry, Mapping):
            entry = {}
        shares.append(Share(
            index=index,
            base=entry.get("base"),
            encoded_value=entry.get("value")
        ))

    shares.sort(key=lambda share: share.index)
    return ReconstructionRequest(k=k, n=n, shares=tuple(shares))
