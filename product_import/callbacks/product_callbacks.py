"""Callbacks for the standard and the user defined product attributes."""

from __future__ import annotations

from typing import Any

from product_import.models.enums import MemberNames

from .base_callback import BaseCallback

BOOLEAN_VALUES = {
    "1": 1, "0": 0,
    "yes": 1, "no": 0,
    "true": 1, "false": 0,
    "y": 1, "n": 0,
}


class VisibilityCallback(BaseCallback):
    """'Catalog, Search' => 4"""

    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        return int(self.subject.get_visibility_id_by_value(attribute_value))


class TaxClassCallback(BaseCallback):
    """Tax class name => class ID, 'None' stands for the class ID 0."""

    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        if attribute_value == "None":
            return 0

        tax_class = self.subject.get_tax_class_by_tax_class_name(attribute_value)
        if tax_class is None:
            raise self.invalid_value(attribute_code, attribute_value)
        return tax_class[MemberNames.CLASS_ID]


class SelectCallback(BaseCallback):
    """Option label => option ID in the store of the actual row."""

    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        return self.option_id(attribute_code, attribute_value)

    def option_id(self, attribute_code: str, attribute_value: Any) -> int:
        option_value = self.subject.get_eav_attribute_option_value_by_option_value_and_store_id(
            attribute_value, self.subject.get_row_store_id()
        )
        if option_value is None:
            raise self.invalid_value(attribute_code, attribute_value)
        return option_value[MemberNames.OPTION_ID]


class MultiselectCallback(SelectCallback):
    """'Red|Blue' => '12,13'"""

    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        delimiter = self.subject.get_multiple_value_delimiter()
        option_ids = [
            str(self.option_id(attribute_code, label.strip()))
            for label in str(attribute_value).split(delimiter)
            if label.strip()
        ]
        return ",".join(option_ids)


class BooleanCallback(BaseCallback):
    """Yes/No, true/false and 1/0 => 1/0"""

    def handle(self, attribute_code: str, attribute_value: Any) -> Any:
        if isinstance(attribute_value, bool):
            return int(attribute_value)
        try:
            return BOOLEAN_VALUES[str(attribute_value).strip().lower()]
        except KeyError:
            raise self.invalid_value(attribute_code, attribute_value)
