import re
from dataclasses import dataclass

from ..exceptions.domain_exceptions import InvalidClientIdError


@dataclass(frozen=True)
class ClientId:
    """Opaque browser identifier that namespaces stored chats."""

    value: str

    PATTERN = re.compile(r"^[\w.\-]{1,128}$")

    def __post_init__(self) -> None:
        if not self.value or not self.PATTERN.match(self.value):
            raise InvalidClientIdError(f"Invalid client ID: {self.value!r}")

    def __str__(self) -> str:
        return self.value
