"""Base abstractions for attribute callbacks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from product_import.core.exceptions import InvalidAttributeValueException

if TYPE_CHECKING:
    from product_import.subjects.bunch_subject import BunchSubject


class BaseCallback(ABC):
    """
    Transforms the raw CSV value of one attribute.

    Callbacks run in the order of the attribute's callback mapping; each
    one receives the value returned by the previous one.
    """

    def __init__(self, subject: "BunchSubject", *, name: Optional[str] = None) -> None:
        self._subject = subject
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    @property
    def subject(self) -> "BunchSubject":
        return self._subject

    def __call__(self, attribute_code: str, attribute_value: Any) -> Any:
        if attribute_value is None or attribute_value == "":
            return attribute_value
        return self.handle(attribute_code, attribute_value)

    @abstractmethod
    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        raise NotImplementedError

    def invalid_value(self, attribute_code: str, attribute_value: Any) -> InvalidAttributeValueException:
        return InvalidAttributeValueException(
            attribute_code,
            attribute_value,
            self._subject.get_filename(),
            self._subject.get_line_number(),
        )


class MappingCallback(BaseCallback):
    """Maps the value through a fixed label => code table."""

    mappings: dict = {}

    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        try:
            return self.mappings[attribute_value]
        except KeyError:
            raise self.invalid_value(attribute_code, attribute_value)
