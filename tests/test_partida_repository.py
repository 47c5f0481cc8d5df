"""
Tests for the persistence layer.

Covers:
- Partida identity-based equality and text representation
- PartidaRepository get / exists / save / delete / find / count
"""

import pytest
from sqlalchemy.exc import IntegrityError

from app.models.partida import Partida
from app.repositories.partida_repository import PartidaRepository


class TestPartidaModel:
    """Test Partida entity semantics."""

    def test_equals_by_id(self):
        p1 = Partida(id=1, ganador="A", perdedor="B", puntos_del_ganador=1)
        p2 = Partida(id=1, ganador="X", perdedor="Y", puntos_del_ganador=9)
        assert p1 == p2

        p2.id = 2
        assert p1 != p2

    def test_unsaved_instances_are_never_equal(self):
        p1 = Partida(ganador="A", perdedor="B", puntos_del_ganador=1)
        p2 = Partida(ganador="A", perdedor="B", puntos_del_ganador=1)

        assert p1 != p2
        assert p1 == p1

    def test_not_equal_to_other_types(self):
        assert Partida(id=1) != 1

    def test_hash_is_stable_across_persist(self, db_session):
        partida = Partida(ganador="A", perdedor="B", puntos_del_ganador=1)
        before = hash(partida)
        PartidaRepository(db_session).save(partida)
        assert hash(partida) == before

    def test_repr(self):
        partida = Partida(id=3, ganador="A", perdedor="B", puntos_del_ganador=10)
        assert repr(partida) == "Partida{id=3, ganador='A', perdedor='B', puntosDelGanador=10}"


class TestPartidaRepository:
    """Test PartidaRepository against in-memory SQLite."""

    @pytest.fixture
    def repo(self, db_session):
        return PartidaRepository(db_session)

    def test_save_assigns_id(self, repo):
        saved = repo.save(Partida(ganador="A", perdedor="B", puntos_del_ganador=10))

        assert saved.id is not None
        assert repo.exists(saved.id)
        assert repo.get(saved.id).ganador == "A"

    def test_save_with_id_replaces_row(self, repo, make_partida):
        existing = make_partida("A", "B", 10)

        repo.save(Partida(id=existing.id, ganador="C", perdedor="D", puntos_del_ganador=2))

        stored = repo.get(existing.id)
        assert (stored.ganador, stored.perdedor, stored.puntos_del_ganador) == ("C", "D", 2)
        assert repo.count() == 1

    def test_exists_unknown_id(self, repo):
        assert repo.exists(99) is False
        assert repo.get(99) is None

    def test_delete(self, repo, make_partida):
        partida = make_partida()
        partida_id = partida.id

        repo.delete(partida_id)

        assert repo.exists(partida_id) is False

    def test_delete_unknown_id_is_noop(self, repo, make_partida):
        make_partida()

        repo.delete(1234)

        assert repo.count() == 1

    def test_find_with_conditions_and_order(self, repo, make_partida):
        make_partida("C", "x", 1)
        make_partida("A", "x", 20)
        make_partida("B", "x", 30)

        result = repo.find(
            [Partida.puntos_del_ganador >= 10],
            order_by=[Partida.ganador.asc()],
        )

        assert [p.ganador for p in result] == ["A", "B"]

    def test_find_offset_and_limit(self, repo, make_partida):
        for name in "ABCDE":
            make_partida(name, "x", 1)

        result = repo.find(order_by=[Partida.id.asc()], offset=1, limit=2)

        assert [p.ganador for p in result] == ["B", "C"]

    def test_count_with_conditions(self, repo, make_partida):
        make_partida("A", "B", 1)
        make_partida("A", "C", 2)
        make_partida("B", "C", 3)

        assert repo.count() == 3
        assert repo.count([Partida.ganador == "A"]) == 2

    def test_not_null_columns_enforced(self, repo, db_session):
        with pytest.raises(IntegrityError):
            repo.save(Partida(ganador="A", perdedor=None, puntos_del_ganador=1))
        db_session.rollback()

    def test_negative_puntos_rejected_by_database(self, repo, db_session):
        with pytest.raises(IntegrityError):
            repo.save(Partida(ganador="A", perdedor="B", puntos_del_ganador=-1))
        db_session.rollback()
