"""
Main fixtures of the product import tests
"""
from typing import Generator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

import product_import.models  # noqa: F401  registers every table on Base.metadata
from product_import.config.config_schema import ImportConfiguration
from product_import.database import Base
from product_import.services.interfaces.product_processor_interface import IProductProcessor
from product_import.services.product_processor import ProductProcessor
from product_import.subjects.bunch_subject import BunchSubject
from product_import.subjects.row_context import RowContext


# ============================================================================
# Database Test Setup
# ============================================================================

# In-memory SQLite for the tests
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Creates an isolated database session for every test.
    Rolled back automatically at the end of the test.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()

    try:
        yield session
        session.rollback()
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def processor(db_session: Session) -> ProductProcessor:
    return ProductProcessor.from_session(db_session)


# ============================================================================
# Subject Setup
# ============================================================================

@pytest.fixture
def mock_processor() -> MagicMock:
    """Processor mock without user defined attributes"""
    mock = MagicMock(spec=IProductProcessor)
    mock.get_eav_attribute_by_is_user_defined.return_value = []
    return mock


@pytest.fixture
def row_context() -> RowContext:
    return RowContext(filename="products.csv", line_number=7, last_entity_id=1, store_id=0)


@pytest.fixture
def configuration() -> ImportConfiguration:
    return ImportConfiguration()


@pytest.fixture
def subject(mock_processor, configuration, row_context) -> BunchSubject:
    bunch_subject = BunchSubject(mock_processor, configuration, context=row_context)
    bunch_subject.set_up()
    return bunch_subject
