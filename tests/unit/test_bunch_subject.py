import logging
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from product_import.callbacks import BaseCallback, CallbackRegistry
from product_import.config.config_schema import ImportConfiguration
from product_import.core.exceptions import (
    DateParseException,
    ErrorCode,
    InvalidNumberException,
    InvalidVisibilityException,
    ValidationException,
)
from product_import.models.enums import BackendType, DeleteStrategy, VisibilityKey
from product_import.services.interfaces.product_processor_interface import IProductProcessor
from product_import.subjects.bunch_subject import BunchSubject
from product_import.subjects.row_context import RowContext


class AppendSuffixCallback(BaseCallback):
    def handle(self, attribute_code, attribute_value):
        return f"{attribute_value}-suffix"


def make_subject(processor, context=None, registry=None, **configuration):
    subject = BunchSubject(processor, ImportConfiguration(**configuration), context=context, callback_registry=registry)
    subject.set_up()
    return subject


# ============================================================================
# Callback mappings
# ============================================================================

def test_set_up_merges_user_defined_attributes_and_configuration(mock_processor):
    mock_processor.get_eav_attribute_by_is_user_defined.return_value = [
        {"attribute_code": "color", "frontend_input": "select"},
        {"attribute_code": "size", "frontend_input": "select"},
    ]

    subject = make_subject(mock_processor, callbacks=[{"size": ["boolean"]}])

    mappings = subject.get_callback_mappings()
    assert mappings["color"] == ("select",)
    assert mappings["size"] == ("boolean",)
    assert mappings["visibility"] == ("visibility",)
    mock_processor.get_eav_attribute_by_is_user_defined.assert_called_once_with(1)


def test_set_up_logs_overridden_mappings(mock_processor, caplog):
    with caplog.at_level(logging.INFO):
        make_subject(mock_processor, callbacks=[{"visibility": ["select"]}])

    assert "Now override callback mappings for attribute visibility" in caplog.text


def test_set_up_twice_gives_the_same_mappings(mock_processor):
    mock_processor.get_eav_attribute_by_is_user_defined.return_value = [
        {"attribute_code": "visibility", "frontend_input": "select"},
    ]
    subject = make_subject(mock_processor)
    first = dict(subject.get_callback_mappings())

    subject.set_up()

    assert dict(subject.get_callback_mappings()) == first
    assert first["visibility"] == ("visibility", "select")


def test_callback_mappings_are_empty_before_set_up(mock_processor, configuration):
    subject = BunchSubject(mock_processor, configuration)

    assert dict(subject.get_callback_mappings()) == {}
    assert subject.get_callbacks_by_type("visibility") == []


def test_handle_callbacks_runs_the_callbacks_in_order(mock_processor):
    registry = CallbackRegistry()
    registry.register("suffix", AppendSuffixCallback)
    subject = make_subject(mock_processor, registry=registry, callbacks=[{"name": ["suffix", "suffix"]}])

    assert subject.handle_callbacks("name", "shirt") == "shirt-suffix-suffix"


def test_handle_callbacks_without_callbacks_returns_the_value(subject):
    assert subject.handle_callbacks("description", "Some text") == "Some text"


def test_handle_callbacks_visibility(subject):
    assert subject.handle_callbacks("visibility", "Catalog") == 2


def test_callbacks_are_instantiated_once_per_bunch(subject):
    first = subject.get_callbacks_by_type("visibility")

    assert [callback.name for callback in first] == ["VisibilityCallback"]
    assert subject.get_callbacks_by_type("visibility")[0] is first[0]


# ============================================================================
# Casting
# ============================================================================

def test_cast_datetime_with_default_format(subject):
    assert subject.cast_value_by_backend_type("datetime", "10/23/16, 5:10 PM") == "2016-10-23 17:10:00"


def test_cast_datetime_zeroes_missing_time(mock_processor):
    subject = make_subject(mock_processor, source_date_format="Y-m-d")

    assert subject.cast_value_by_backend_type(BackendType.DATETIME, "2023-01-05") == "2023-01-05 00:00:00"


def test_cast_datetime_with_strftime_format(mock_processor):
    subject = make_subject(mock_processor, source_date_format="%d.%m.%Y %H:%M")

    assert subject.cast_value_by_backend_type("datetime", "05.01.2023 08:30") == "2023-01-05 08:30:00"


@pytest.mark.parametrize("value", ["not a date", "2023-01-05", 20230105])
def test_cast_datetime_rejects_unparseable_values(subject, value):
    with pytest.raises(DateParseException) as exc_info:
        subject.cast_value_by_backend_type("datetime", value)

    assert exc_info.value.error_code == ErrorCode.DATE_PARSE_ERROR.value
    assert exc_info.value.details["line_number"] == 7


@pytest.mark.parametrize(
    "backend_type, value, expected",
    [
        ("float", "12.5", 12.5),
        ("float", " 3 ", 3.0),
        ("float", 7, 7.0),
        ("int", "42", 42),
        ("int", "1e3", 1000),
        ("int", 5, 5),
    ],
)
def test_cast_numbers(subject, backend_type, value, expected):
    result = subject.cast_value_by_backend_type(backend_type, value)

    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("backend_type, value", [("float", "12kg"), ("int", "abc"), ("float", "nan"), ("int", "")])
def test_strict_cast_rejects_non_numeric_values(subject, backend_type, value):
    with pytest.raises(InvalidNumberException) as exc_info:
        subject.cast_value_by_backend_type(backend_type, value)

    assert exc_info.value.value == value
    assert exc_info.value.details["backend_type"] == backend_type


@pytest.mark.parametrize(
    "backend_type, value, expected",
    [
        ("float", "12.5kg", 12.5),
        ("float", "abc", 0.0),
        ("int", "12abc", 12),
        ("int", " -3 items", -3),
        ("int", "", 0),
    ],
)
def test_lenient_cast_takes_the_leading_number(mock_processor, backend_type, value, expected):
    subject = make_subject(mock_processor, strict_numeric_cast=False)

    result = subject.cast_value_by_backend_type(backend_type, value)

    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "backend_type, value",
    [
        ("int", "1e20000000"),
        ("int", "-1e200000000"),
        ("int", "1e19"),
        ("int", "9.3e18"),
        ("int", 2 ** 70),
        ("float", "1e20000000"),
        ("float", "1e400"),
        ("float", float("inf")),
    ],
)
def test_strict_cast_rejects_out_of_range_numbers(subject, backend_type, value):
    with pytest.raises(InvalidNumberException) as exc_info:
        subject.cast_value_by_backend_type(backend_type, value)

    assert exc_info.value.details["line_number"] == 7


@pytest.mark.parametrize(
    "backend_type, value, expected",
    [
        ("int", "1e20000000", 0),
        ("int", "1e20000000 pieces", 0),
        ("int", "-1e200000000", 0),
        ("int", "1e-20000000", 0),
        ("int", 2 ** 70, 0),
        ("float", "1e20000000", 0.0),
        ("float", "1e400", 0.0),
    ],
)
def test_lenient_cast_falls_back_to_zero_for_out_of_range_numbers(mock_processor, backend_type, value, expected):
    subject = make_subject(mock_processor, strict_numeric_cast=False)

    result = subject.cast_value_by_backend_type(backend_type, value)

    assert result == expected
    assert type(result) is type(expected)


def test_strict_cast_accepts_the_int_range(subject):
    assert subject.cast_value_by_backend_type("int", "9223372036854775807") == 2 ** 63 - 1
    assert subject.cast_value_by_backend_type("int", "-9.2e18") == -9200000000000000000
    assert subject.cast_value_by_backend_type("int", "1e-20000000") == 0


@pytest.mark.parametrize("backend_type", ["int", "float"])
def test_underscores_are_not_part_of_a_number(mock_processor, backend_type):
    strict = make_subject(mock_processor)
    lenient = make_subject(mock_processor, strict_numeric_cast=False)

    with pytest.raises(InvalidNumberException):
        strict.cast_value_by_backend_type(backend_type, "1_000")
    assert lenient.cast_value_by_backend_type(backend_type, "1_000") == 1


def test_cast_datetime_with_escaped_percent_sign(mock_processor):
    subject = make_subject(mock_processor, source_date_format=r"Y-m-d \%")

    assert subject.cast_value_by_backend_type("datetime", "2023-01-05 %") == "2023-01-05 00:00:00"


@pytest.mark.parametrize("backend_type", ["decimal", "text", "varchar", "static"])
def test_other_backend_types_are_not_cast(subject, backend_type):
    assert subject.cast_value_by_backend_type(backend_type, "12.50") == "12.50"


def test_cast_unknown_backend_type(subject):
    with pytest.raises(ValidationException) as exc_info:
        subject.cast_value_by_backend_type("blob", "x")

    assert exc_info.value.error_code == ErrorCode.UNKNOWN_BACKEND_TYPE.value


# ============================================================================
# Mappings
# ============================================================================

def test_visibility_ids(subject):
    assert subject.get_visibility_id_by_value("Not Visible Individually") == VisibilityKey.VISIBILITY_NOT_VISIBLE
    assert subject.get_visibility_id_by_value("Catalog") == 2
    assert subject.get_visibility_id_by_value("Search") == 3
    assert subject.get_visibility_id_by_value("Catalog, Search") == 4


def test_invalid_visibility(subject):
    with pytest.raises(InvalidVisibilityException) as exc_info:
        subject.get_visibility_id_by_value("bogus")

    assert exc_info.value.value == "bogus"
    assert str(exc_info.value) == "Found invalid visibility bogus in file products.csv on line 7"


def test_header_stock_mappings(subject):
    mappings = subject.get_header_stock_mappings()

    assert len(mappings) == 20
    assert mappings["qty"] == ("qty", BackendType.FLOAT)
    assert mappings["min_qty"] == ("out_of_stock_qty", BackendType.FLOAT)
    assert mappings["backorders"] == ("allow_backorders", BackendType.INT)
    assert mappings["notify_stock_qty"] == ("notify_on_stock_below", BackendType.FLOAT)


def test_backend_types_name_methods_of_the_subject(subject):
    backend_types = subject.get_backend_types()

    assert set(backend_types) == {
        BackendType.DATETIME, BackendType.DECIMAL, BackendType.INT, BackendType.TEXT, BackendType.VARCHAR
    }
    for persist_method, load_method in backend_types.values():
        assert callable(getattr(subject, persist_method))
        assert callable(getattr(subject, load_method))


# ============================================================================
# Row state
# ============================================================================

def test_attribute_set(subject):
    assert subject.get_attribute_set() == {}

    subject.set_attribute_set({"attribute_set_id": 4, "attribute_set_name": "Default"})

    assert subject.get_attribute_set()["attribute_set_id"] == 4


def test_product_category_ids_are_tracked_per_product(subject, row_context):
    subject.add_product_category_id(3)
    subject.add_product_category_id(5)
    subject.add_product_category_id(3)

    row_context.last_entity_id = 2
    subject.add_product_category_id(8)

    assert subject.get_product_category_ids() == {8}
    row_context.last_entity_id = 1
    assert subject.get_product_category_ids() == {3, 5}


def test_product_category_ids_returns_a_copy(subject):
    subject.add_product_category_id(3)
    subject.get_product_category_ids().add(99)

    assert subject.get_product_category_ids() == {3}


def test_product_category_ids_of_unknown_product(subject, row_context):
    row_context.last_entity_id = 42

    assert subject.get_product_category_ids() == set()


def test_context_getters(subject, configuration):
    assert subject.get_filename() == "products.csv"
    assert subject.get_line_number() == 7
    assert subject.get_last_entity_id() == 1
    assert subject.get_row_store_id() == 0
    assert subject.get_source_date_format() == configuration.source_date_format
    assert subject.get_multiple_value_delimiter() == "|"


def test_default_context(mock_processor, configuration):
    subject = BunchSubject(mock_processor, configuration)

    assert subject.context == RowContext()
    assert subject.get_row_store_id() == 0


# ============================================================================
# Delegation
# ============================================================================

@pytest.mark.parametrize(
    "method, args",
    [
        ("load_product", ("PROD001",)),
        ("load_product_website", (1, 1)),
        ("load_category_product", (3, 1)),
        ("load_stock_status", (1, 0, 1)),
        ("load_stock_item", (1, 0, 1)),
        ("load_product_datetime_attribute", (1, 73, 0)),
        ("load_product_decimal_attribute", (1, 73, 0)),
        ("load_product_int_attribute", (1, 73, 0)),
        ("load_product_text_attribute", (1, 73, 0)),
        ("load_product_varchar_attribute", (1, 73, 0)),
        ("load_url_rewrite_product_category", (1, 3)),
        ("get_eav_attribute_option_value_by_option_value_and_store_id", ("Red", 0)),
        ("get_url_rewrites_by_entity_type_and_entity_id", ("product", 1)),
        ("get_tax_class_by_tax_class_name", ("Taxable Goods",)),
    ],
)
def test_lookups_are_forwarded_to_the_processor(subject, mock_processor, method, args):
    getattr(mock_processor, method).return_value = {"found": True}

    assert getattr(subject, method)(*args) == {"found": True}
    getattr(mock_processor, method).assert_called_once_with(*args)


@pytest.mark.parametrize(
    "method",
    [
        "persist_product_varchar_attribute",
        "persist_product_int_attribute",
        "persist_product_decimal_attribute",
        "persist_product_datetime_attribute",
        "persist_product_text_attribute",
        "persist_product_website",
        "persist_category_product",
        "persist_stock_item",
        "persist_stock_status",
        "persist_url_rewrite_product_category",
    ],
)
def test_persists_are_forwarded_to_the_processor(subject, mock_processor, method):
    record = {"product_id": 1, "value": Decimal("1.5")}

    getattr(subject, method)(record)

    getattr(mock_processor, method).assert_called_once_with(record)


def test_persist_product_returns_the_entity_id(subject, mock_processor):
    mock_processor.persist_product.return_value = 17

    assert subject.persist_product({"sku": "PROD001"}) == 17


def test_persist_url_rewrite_returns_the_id(subject, mock_processor):
    mock_processor.persist_url_rewrite.return_value = 5

    assert subject.persist_url_rewrite({"entity_id": 1}) == 5


@pytest.mark.parametrize(
    "method",
    [
        "delete_product",
        "delete_url_rewrite",
        "delete_stock_item",
        "delete_stock_status",
        "delete_product_website",
        "delete_category_product",
    ],
)
@pytest.mark.parametrize("strategy", [None, DeleteStrategy.BY_SKU, DeleteStrategy.BY_ENTITY_ID])
def test_deletes_pass_the_strategy_through(subject, mock_processor, method, strategy):
    row = {"sku": "PROD001", "product_id": 1}

    getattr(subject, method)(row, strategy)

    getattr(mock_processor, method).assert_called_once_with(row, strategy)


def test_processor_errors_are_propagated(subject, mock_processor):
    mock_processor.load_product.side_effect = RuntimeError("connection lost")

    with pytest.raises(RuntimeError):
        subject.load_product("PROD001")


def test_works_with_any_processor_implementation(configuration):
    processor = MagicMock(spec=IProductProcessor)
    processor.get_eav_attribute_by_is_user_defined.return_value = []
    subject = make_subject(processor)

    assert subject.get_processor() is processor
    assert subject.get_configuration().multiple_value_delimiter == "|"
