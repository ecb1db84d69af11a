from typing import Any, Iterable, Optional, Union

from typing_extensions import Protocol

from emailaddress.criteria import Criteria

CriteriaArgType = Union[Criteria, Iterable[Criteria]]


class AddressFactory(Protocol):
    def __call__(
        self, address: str, personal: Optional[str] = None, charset: str = "utf-8"
    ) -> Any: ...
