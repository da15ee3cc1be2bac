"""Tests for dialect type mapping."""

import pytest

from db_introspector_gadget.database.models import (
    Dialect,
    Enumeration,
    Primitive,
    PrimitiveKind,
    Unknown,
)
from db_introspector_gadget.database.type_mappers import (
    MySQLTypeMapper,
    PostgresTypeMapper,
    get_type_mapper,
    map_type,
    normalize_type_name,
)


class TestNormalizeTypeName:
    """Test raw type name normalization."""

    def test_strips_length(self):
        assert normalize_type_name("VARCHAR(255)") == "varchar"

    def test_strips_precision_and_scale(self):
        assert normalize_type_name("DECIMAL(10, 2)") == "decimal"

    def test_strips_inner_parameters(self):
        assert normalize_type_name("timestamp(6) with time zone") == "timestamp with time zone"

    def test_collapses_whitespace(self):
        assert normalize_type_name("  Double   Precision ") == "double precision"


class TestMySQLTypeMapper:
    """Test MySQL COLUMN_TYPE mapping."""

    @pytest.fixture
    def mapper(self):
        return MySQLTypeMapper()

    @pytest.mark.parametrize("raw_type,kind", [
        ("varchar(255)", PrimitiveKind.STRING),
        ("longtext", PrimitiveKind.STRING),
        ("char(36)", PrimitiveKind.STRING),
        ("set('a','b')", PrimitiveKind.STRING),
        ("int", PrimitiveKind.INTEGER),
        ("int(11) unsigned", PrimitiveKind.INTEGER),
        ("bigint unsigned zerofill", PrimitiveKind.INTEGER),
        ("year", PrimitiveKind.INTEGER),
        ("double", PrimitiveKind.FLOAT),
        ("float", PrimitiveKind.FLOAT),
        ("decimal(10,2)", PrimitiveKind.DECIMAL),
        ("date", PrimitiveKind.DATE),
        ("datetime(3)", PrimitiveKind.DATETIME),
        ("timestamp", PrimitiveKind.DATETIME),
        ("time", PrimitiveKind.TIME),
        ("varbinary(16)", PrimitiveKind.BINARY),
        ("longblob", PrimitiveKind.BINARY),
        ("json", PrimitiveKind.JSON),
    ])
    def test_primitive_types(self, mapper, raw_type, kind):
        """Test known MySQL types map to their primitive kind."""
        assert mapper.to_output_type(raw_type) == Primitive(kind)

    def test_tinyint_one_is_boolean(self, mapper):
        """Test tinyint(1) is treated as MySQL's boolean."""
        assert mapper.to_output_type("tinyint(1)") == Primitive(PrimitiveKind.BOOLEAN)

    def test_wider_tinyint_is_integer(self, mapper):
        assert mapper.to_output_type("tinyint(4)") == Primitive(PrimitiveKind.INTEGER)
        assert mapper.to_output_type("tinyint unsigned") == Primitive(PrimitiveKind.INTEGER)

    def test_enum_with_variants(self, mapper):
        """Test enum columns produce an Enumeration in declared order."""
        result = mapper.to_output_type(
            "enum('zeta','alpha','mid')",
            enum_variants=["zeta", "alpha", "mid"],
            enum_name="orders_status",
        )
        assert result == Enumeration(name="orders_status", variants=("zeta", "alpha", "mid"))

    def test_enum_variants_not_deduplicated(self, mapper):
        result = mapper.to_output_type("enum('a','a')", enum_variants=("a", "a"), enum_name="t_c")
        assert result.variants == ("a", "a")

    def test_enum_without_variants_falls_back_to_string(self, mapper):
        assert mapper.to_output_type("enum") == Primitive(PrimitiveKind.STRING)

    def test_spatial_type_is_unknown(self, mapper):
        """Test unrecognized types degrade to Unknown instead of failing."""
        assert mapper.to_output_type("geometry") == Unknown()
        assert mapper.to_output_type("point") == Unknown()


class TestPostgresTypeMapper:
    """Test Postgres data_type / udt_name mapping."""

    @pytest.fixture
    def mapper(self):
        return PostgresTypeMapper()

    @pytest.mark.parametrize("raw_type,kind", [
        ("integer", PrimitiveKind.INTEGER),
        ("bigint", PrimitiveKind.INTEGER),
        ("serial", PrimitiveKind.INTEGER),
        ("smallint", PrimitiveKind.INTEGER),
        ("double precision", PrimitiveKind.FLOAT),
        ("real", PrimitiveKind.FLOAT),
        ("numeric", PrimitiveKind.DECIMAL),
        ("money", PrimitiveKind.DECIMAL),
        ("character varying", PrimitiveKind.STRING),
        ("character(10)", PrimitiveKind.STRING),
        ("text", PrimitiveKind.STRING),
        ("citext", PrimitiveKind.STRING),
        ("boolean", PrimitiveKind.BOOLEAN),
        ("date", PrimitiveKind.DATE),
        ("timestamp with time zone", PrimitiveKind.DATETIME),
        ("timestamp without time zone", PrimitiveKind.DATETIME),
        ("time without time zone", PrimitiveKind.TIME),
        ("interval", PrimitiveKind.TIMEDELTA),
        ("bytea", PrimitiveKind.BINARY),
        ("uuid", PrimitiveKind.UUID),
        ("jsonb", PrimitiveKind.JSON),
        ("JSON", PrimitiveKind.JSON),
    ])
    def test_primitive_types(self, mapper, raw_type, kind):
        """Test known Postgres types map to their primitive kind."""
        assert mapper.to_output_type(raw_type) == Primitive(kind)

    def test_enum_type(self, mapper):
        result = mapper.to_output_type("mood", enum_variants=("sad", "ok", "happy"), enum_name="people_mood")
        assert result == Enumeration(name="people_mood", variants=("sad", "ok", "happy"))

    @pytest.mark.parametrize("raw_type", ["geometry", "ARRAY", "tsvector", "hstore"])
    def test_unknown_types(self, mapper, raw_type):
        assert mapper.to_output_type(raw_type) == Unknown()


class TestDialectSeparation:
    """Test the dialect lookup tables do not leak into each other."""

    def test_mysql_only_types_unknown_in_postgres(self):
        assert map_type("tinyint(1)", Dialect.POSTGRES) == Unknown()
        assert map_type("longtext", Dialect.POSTGRES) == Unknown()

    def test_postgres_only_types_unknown_in_mysql(self):
        assert map_type("bytea", Dialect.MYSQL) == Unknown()
        assert map_type("uuid", Dialect.MYSQL) == Unknown()
        assert map_type("timestamp with time zone", Dialect.MYSQL) == Unknown()

    def test_get_type_mapper_accepts_string_dialect(self):
        assert isinstance(get_type_mapper("mysql"), MySQLTypeMapper)
        assert isinstance(get_type_mapper(Dialect.POSTGRES), PostgresTypeMapper)


class TestMapTypePurity:
    """Test map_type returns the same result for the same input."""

    @pytest.mark.parametrize("raw_type,dialect", [
        ("varchar(255)", Dialect.MYSQL),
        ("tinyint(1)", Dialect.MYSQL),
        ("geometry", Dialect.MYSQL),
        ("integer", Dialect.POSTGRES),
        ("USER-DEFINED", Dialect.POSTGRES),
    ])
    def test_repeated_calls_are_equal(self, raw_type, dialect):
        assert map_type(raw_type, dialect) == map_type(raw_type, dialect)

    def test_repeated_enum_calls_are_equal(self):
        first = map_type("mood", Dialect.POSTGRES, ["b", "a"], "t_mood")
        second = map_type("mood", Dialect.POSTGRES, ["b", "a"], "t_mood")
        assert first == second
