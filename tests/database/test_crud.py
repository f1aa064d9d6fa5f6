"""
Unit tests for database CRUD operations.

Uses an in-memory SQLite database for fast, isolated testing.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database.models import Base, Movie
from app.database import crud
from app.database.connection import DatabaseManager, get_database_url
from app.database.init_db import init_database, verify_schema


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


class TestMovieCRUD:
    """Tests for Movie CRUD operations."""

    def test_create_movie(self, session):
        """Test creating a movie assigns an id."""
        movie = crud.create_movie(session, name="Dune", year=2021, point=83)

        assert movie.id is not None
        assert movie.name == "Dune"
        assert movie.year == 2021
        assert movie.point == 83

    def test_create_movie_ids_are_unique(self, session):
        """Test that every created movie gets a new id."""
        ids = {
            crud.create_movie(session, name=f"Movie {i}", year=2000 + i, point=i).id
            for i in range(5)
        }
        assert len(ids) == 5

    def test_create_movie_invalid_point(self, session):
        """Test that a point outside 0..100 raises error."""
        with pytest.raises(ValueError):
            crud.create_movie(session, name="Bad", year=2000, point=101)
        assert crud.get_movie_count(session) == 0

    def test_point_check_constraint(self, session):
        """Test the table itself rejects an out-of-range point."""
        session.add(Movie(name="Bad", year=2000, point=-1))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_get_movie(self, session):
        """Test retrieving a movie by ID."""
        movie = crud.create_movie(session, name="Alien", year=1979, point=90)

        retrieved = crud.get_movie(session, movie.id)
        assert retrieved is not None
        assert retrieved.name == "Alien"

    def test_get_movie_not_found(self, session):
        """Test that getting a non-existent movie returns None."""
        assert crud.get_movie(session, 999) is None

    def test_get_movies_ordered_by_id(self, session):
        """Test listing returns every movie in id order."""
        for name in ("C", "A", "B"):
            crud.create_movie(session, name=name, year=2000, point=50)

        movies = crud.get_movies(session)
        assert [m.name for m in movies] == ["C", "A", "B"]
        assert [m.id for m in movies] == sorted(m.id for m in movies)

    def test_update_movie_replaces_all_fields(self, session):
        """Test update overwrites name, year and point."""
        movie = crud.create_movie(session, name="Dune", year=2021, point=83)

        updated = crud.update_movie(session, movie.id, name="Dune Part Two", year=2024, point=0)

        assert updated.id == movie.id
        assert updated.name == "Dune Part Two"
        assert updated.year == 2024
        assert updated.point == 0

    def test_update_movie_not_found(self, session):
        """Test updating a missing movie returns None."""
        assert crud.update_movie(session, 42, name="X", year=1, point=1) is None

    def test_delete_movie(self, session):
        """Test deleting a movie."""
        movie = crud.create_movie(session, name="Heat", year=1995, point=84)

        assert crud.delete_movie(session, movie.id) is True
        assert crud.get_movie(session, movie.id) is None
        assert crud.get_movie_count(session) == 0

    def test_delete_movie_not_found(self, session):
        """Test deleting a missing movie returns False."""
        assert crud.delete_movie(session, 999) is False


class TestDatabaseManager:
    """Tests for connection management and schema creation."""

    def test_memory_database_url(self):
        assert get_database_url(":memory:") == "sqlite://"

    def test_file_database_url(self, tmp_path):
        db_path = tmp_path / "nested" / "movies.db"
        url = get_database_url(str(db_path))

        assert url == f"sqlite:///{db_path}"
        assert db_path.parent.exists()

    def test_pool_per_database_kind(self, tmp_path):
        """Only the in-memory database shares one connection across threads."""
        memory = DatabaseManager(db_path=":memory:")
        on_disk = DatabaseManager(db_path=str(tmp_path / "movies.db"))
        try:
            assert isinstance(memory.engine.pool, StaticPool)
            assert not isinstance(on_disk.engine.pool, StaticPool)
        finally:
            memory.close()
            on_disk.close()

    def test_init_database_creates_schema(self):
        db_manager = init_database(db_path=":memory:")
        try:
            assert verify_schema(db_manager)
        finally:
            db_manager.close()

    def test_verify_schema_detects_missing_table(self):
        db_manager = DatabaseManager(db_path=":memory:")
        try:
            assert not verify_schema(db_manager)
        finally:
            db_manager.close()

    def test_session_scope_rolls_back_on_error(self):
        db_manager = init_database(db_path=":memory:")
        try:
            with pytest.raises(RuntimeError):
                with db_manager.session_scope() as session:
                    session.add(Movie(name="Lost", year=2000, point=1))
                    session.flush()
                    raise RuntimeError("boom")

            with db_manager.session_scope() as session:
                assert crud.get_movie_count(session) == 0
        finally:
            db_manager.close()

    def test_file_database_persists(self, tmp_path):
        db_path = str(tmp_path / "movies.db")
        db_manager = init_database(db_path=db_path)
        with db_manager.session_scope() as session:
            crud.create_movie(session, name="Persisted", year=2001, point=70)
        db_manager.close()

        reopened = init_database(db_path=db_path)
        try:
            with reopened.session_scope() as session:
                assert [m.name for m in crud.get_movies(session)] == ["Persisted"]
        finally:
            reopened.close()
