"""
Integration tests: subjects created by the factory on the test database
"""
import textwrap
from unittest.mock import MagicMock

import pytest

from product_import.config.config_schema import ImportConfiguration
from product_import.core.exceptions import InvalidAttributeValueException
from product_import.factories.subject_factory import SubjectFactory
from product_import.models.eav_attribute import EavAttribute, EavAttributeOption, EavAttributeOptionValue
from product_import.models.enums import DeleteStrategy
from product_import.models.tax_class import TaxClass
from product_import.subjects.row_context import RowContext
from tests.factories.product_import_factory import create_eav_attribute_data, create_product_data


@pytest.fixture
def catalog(db_session):
    """Base attributes, options and tax classes"""
    db_session.add_all([
        EavAttribute(attribute_id=2, **create_eav_attribute_data("color")),
        EavAttribute(attribute_id=3, **create_eav_attribute_data("material", frontend_input="multiselect", backend_type="varchar")),
        EavAttribute(attribute_id=4, **create_eav_attribute_data("is_new", frontend_input="boolean")),
        EavAttributeOption(option_id=12, attribute_id=2),
        EavAttributeOption(option_id=13, attribute_id=2),
        EavAttributeOption(option_id=20, attribute_id=3),
        EavAttributeOption(option_id=21, attribute_id=3),
        EavAttributeOptionValue(option_id=12, store_id=0, value="Red"),
        EavAttributeOptionValue(option_id=13, store_id=0, value="Blue"),
        EavAttributeOptionValue(option_id=20, store_id=0, value="Cotton"),
        EavAttributeOptionValue(option_id=21, store_id=0, value="Silk"),
        TaxClass(class_id=2, class_name="Taxable Goods", class_type="PRODUCT"),
    ])
    db_session.flush()
    return db_session


def make_factory(**configuration) -> SubjectFactory:
    return SubjectFactory(configuration=ImportConfiguration(**configuration), settings=MagicMock())


def test_subject_resolves_the_attribute_callbacks(catalog):
    context = RowContext(filename="products.csv", line_number=2)
    subject = make_factory().create_subject(catalog, context)

    assert subject.handle_callbacks("color", "Blue") == 13
    assert subject.handle_callbacks("material", "Cotton|Silk") == "20,21"
    assert subject.handle_callbacks("is_new", "Yes") == 1
    assert subject.handle_callbacks("visibility", "Catalog, Search") == 4
    assert subject.handle_callbacks("tax_class_id", "Taxable Goods") == 2
    assert subject.handle_callbacks("bundle_price_type", "fixed") == 1


def test_unknown_option_reports_the_row(catalog):
    context = RowContext(filename="products.csv", line_number=2)
    subject = make_factory().create_subject(catalog, context)
    context.line_number = 9

    with pytest.raises(InvalidAttributeValueException) as exc_info:
        subject.handle_callbacks("color", "Purple")

    assert exc_info.value.details == {
        "attribute_code": "color", "value": "Purple", "filename": "products.csv", "line_number": 9
    }


def test_configured_callbacks_override_the_input_type(catalog):
    subject = make_factory(callbacks=[{"color": ["boolean"]}]).create_subject(catalog)

    assert subject.get_callback_mappings()["color"] == ("boolean",)
    assert subject.handle_callbacks("color", "no") == 0


def test_import_one_product(catalog):
    context = RowContext(filename="products.csv", line_number=2)
    subject = make_factory(source_date_format="Y-m-d").create_subject(catalog, context)

    context.last_entity_id = subject.persist_product(create_product_data())
    subject.persist_product_int_attribute(
        {"entity_id": context.last_entity_id, "attribute_id": 2, "store_id": 0,
         "value": subject.handle_callbacks("color", "Red")}
    )
    subject.persist_product_datetime_attribute(
        {"entity_id": context.last_entity_id, "attribute_id": 93, "store_id": 0,
         "value": subject.cast_value_by_backend_type("datetime", "2023-01-05")}
    )
    stock_item = {"product_id": context.last_entity_id, "website_id": 0, "stock_id": 1}
    for column, (header, backend_type) in subject.get_header_stock_mappings().items():
        stock_item[column] = subject.cast_value_by_backend_type(backend_type, {"qty": "15"}.get(header, "0"))
    subject.persist_stock_item(stock_item)
    subject.add_product_category_id(3)
    for category_id in subject.get_product_category_ids():
        subject.persist_category_product({"category_id": category_id, "product_id": context.last_entity_id})

    product = subject.load_product("PROD001")
    assert product["entity_id"] == context.last_entity_id
    assert subject.load_product_int_attribute(product["entity_id"], 2, 0)["value"] == 12
    assert subject.load_product_datetime_attribute(product["entity_id"], 93, 0)["value"].year == 2023
    assert subject.load_stock_item(product["entity_id"], 0, 1)["qty"] == 15.0
    assert subject.load_category_product(3, product["entity_id"]) is not None

    subject.delete_product({"sku": "PROD001"}, DeleteStrategy.BY_SKU)

    assert subject.load_product("PROD001") is None


def test_configuration_is_loaded_from_the_settings(tmp_path, db_session):
    path = tmp_path / "product_import.yaml"
    path.write_text(
        textwrap.dedent(
            """
            source_date_format: "d.m.Y"
            callbacks:
              - visibility: [boolean]
            """
        ),
        encoding="utf-8",
    )
    settings = MagicMock()
    settings.configuration_path = str(path)

    subject = SubjectFactory(settings=settings).create_subject(db_session)

    assert subject.get_source_date_format() == "d.m.Y"
    assert subject.get_callback_mappings()["visibility"] == ("boolean",)


def test_missing_configuration_file_uses_the_defaults(tmp_path, db_session):
    settings = MagicMock()
    settings.configuration_path = str(tmp_path / "missing.yaml")

    subject = SubjectFactory(settings=settings).create_subject(db_session)

    assert subject.get_source_date_format() == "n/d/y, g:i A"
