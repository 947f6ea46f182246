"""查询结果转 options 工具的单元测试。"""

from types import SimpleNamespace

import pytest
from sqlalchemy import Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from former.utils.query_utils import query_to_array
from former.utils.translation import CatalogTranslator, LazyTranslation


class Base(DeclarativeBase):
    pass


class Country(Base):
    __tablename__ = "countries"

    code: Mapped[str] = mapped_column(String(2), primary_key=True)
    name: Mapped[str] = mapped_column(String(64))

    def __str__(self) -> str:
        return self.name


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(64))


class Named:
    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return f"named:{self.name}"


class Keyed:
    def __init__(self, key: str, title: str) -> None:
        self._key = key
        self.title = title

    def get_key(self) -> str:
        return self._key


@pytest.fixture
def session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as db_session:
        db_session.add_all(
            [
                Country(code="fr", name="France"),
                Country(code="de", name="Germany"),
                Role(id=1, label="Admin"),
                Role(id=2, label=""),
                Role(id=3, label="Viewer"),
            ],
        )
        db_session.commit()
        yield db_session
    engine.dispose()


@pytest.mark.unit
def test_query_to_array_with_dict_records() -> None:
    assert query_to_array([{"id": 1, "name": "A"}], "name", "id") == {1: "A"}


@pytest.mark.unit
def test_query_to_array_skips_empty_values() -> None:
    records = [{"id": 1, "name": "A"}, {"id": 2, "name": ""}, {"id": 3, "name": None}]

    assert query_to_array(records, "name", "id") == {1: "A"}


@pytest.mark.unit
def test_query_to_array_returns_empty_input_unchanged() -> None:
    records: list[object] = []

    assert query_to_array(records, "name", "id") is records


@pytest.mark.unit
def test_query_to_array_returns_input_when_nothing_usable() -> None:
    records = [{"id": 1, "name": ""}]

    assert query_to_array(records, "name", "id") is records


@pytest.mark.unit
def test_query_to_array_uses_id_when_key_field_missing() -> None:
    records = [SimpleNamespace(id=7, name="Seven")]

    assert query_to_array(records, "name", "slug") == {7: "Seven"}


@pytest.mark.unit
def test_query_to_array_falls_back_to_value_as_key() -> None:
    records = [SimpleNamespace(name="Only")]

    assert query_to_array(records, "name") == {"Only": "Only"}


@pytest.mark.unit
def test_query_to_array_uses_str_when_value_field_missing() -> None:
    assert query_to_array([Named("x")], "missing") == {"named:x": "named:x"}


@pytest.mark.unit
def test_query_to_array_skips_records_without_text() -> None:
    """既没有字段也没有自定义 __str__ 的记录被跳过."""
    records = [SimpleNamespace(id=1), {"id": 2}]

    assert query_to_array(records, "name", "id") is records


@pytest.mark.unit
def test_query_to_array_uses_get_key() -> None:
    records = [Keyed("k1", "First"), Keyed("k2", "Second")]

    assert query_to_array(records, "title") == {"k1": "First", "k2": "Second"}


@pytest.mark.unit
def test_query_to_array_scalar_values() -> None:
    assert query_to_array(["red", "blue"]) == {"red": "red", "blue": "blue"}
    assert query_to_array((1, 2)) == {1: "1", 2: "2"}


@pytest.mark.unit
def test_query_to_array_wraps_single_record() -> None:
    assert query_to_array({"id": 5, "name": "Five"}, "name", "id") == {5: "Five"}
    assert query_to_array("solo") == {"solo": "solo"}


@pytest.mark.unit
def test_query_to_array_materializes_generators() -> None:
    records = ({"id": index, "name": f"n{index}"} for index in range(2))

    assert query_to_array(records, "name", "id") == {0: "n0", 1: "n1"}


@pytest.mark.unit
def test_query_to_array_none_input() -> None:
    assert query_to_array(None, "name", "id") == []


@pytest.mark.unit
def test_query_to_array_coerces_values_to_str() -> None:
    assert query_to_array([{"id": "a", "size": 12}], "size", "id") == {"a": "12"}


@pytest.mark.unit
def test_query_to_array_materializes_orm_query(session) -> None:
    query = session.query(Role).order_by(Role.id)

    assert query_to_array(query, "label", "id") == {1: "Admin", 3: "Viewer"}


@pytest.mark.unit
def test_query_to_array_materializes_scalar_result(session) -> None:
    result = session.scalars(select(Role).order_by(Role.id))

    assert query_to_array(result, "label") == {1: "Admin", 3: "Viewer"}


@pytest.mark.unit
def test_query_to_array_uses_mapped_primary_key(session) -> None:
    """没有 id 字段时使用映射实例的主键."""
    countries = session.query(Country).order_by(Country.code).all()

    assert query_to_array(countries) == {"de": "Germany", "fr": "France"}


@pytest.mark.unit
def test_query_to_array_unwraps_translated_option_list() -> None:
    translator = CatalogTranslator({"options": {"colors": {"red": "Rouge", "blue": "Bleu", "none": ""}}})

    options = query_to_array(LazyTranslation(translator, "options.colors"))

    assert options == {"red": "Rouge", "blue": "Bleu"}


@pytest.mark.unit
def test_query_to_array_unwraps_translated_list() -> None:
    translator = CatalogTranslator({"options": {"sizes": ["S", "M"]}})

    assert query_to_array(LazyTranslation(translator, "options.sizes")) == {"S": "S", "M": "M"}
