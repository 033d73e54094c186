"""Unit tests for data-access capability protocols."""

from shared_kernel.datasource import Entity, Query, Repository
from tests.unit.shared_kernel.authorization.policy.resources import (
    Article,
    ArticlesQuery,
    ArticlesTable,
    QueryableTable,
    Report,
)


class TestEntityProtocol:
    """Tests for structural matching of entities."""

    def test_matches_record_with_entity_methods(self):
        assert isinstance(Article(), Entity)

    def test_does_not_match_repository(self):
        assert not isinstance(ArticlesTable(), Entity)

    def test_does_not_match_plain_object(self):
        assert not isinstance(Report(), Entity)


class TestRepositoryProtocol:
    """Tests for structural matching of repositories."""

    def test_matches_object_with_alias(self):
        assert isinstance(ArticlesTable(), Repository)

    def test_does_not_match_query(self):
        assert not isinstance(ArticlesQuery(ArticlesTable()), Repository)


class TestQueryProtocol:
    """Tests for structural matching of queries."""

    def test_matches_object_with_repository_accessor(self):
        assert isinstance(ArticlesQuery(ArticlesTable()), Query)

    def test_object_can_be_both_repository_and_query(self):
        table = QueryableTable()
        assert isinstance(table, Repository)
        assert isinstance(table, Query)

    def test_does_not_match_entity(self):
        assert not isinstance(Article(), Query)
