"""Building blocks shared by the task domain: Result values and the event base."""

from toru.domain.shared.events import DomainEvent
from toru.domain.shared.result import Err, Ok, Result, flat_map, map_result

__all__ = [
    "Ok",
    "Err",
    "Result",
    "map_result",
    "flat_map",
    "DomainEvent",
]
