import pytest
from sqlalchemy.exc import SQLAlchemyError

from mechanic_shop.db import Gateway, get_db_url


def test_print_result_header_rows_and_count(db, seed, capsys):
    seed("Car", ("VIN1", "Ford", "Escort", 1990), ("VIN2", "Honda", "Civic", 2005))
    n = db.execute_query_and_print_result("SELECT vin, make, year FROM Car ORDER BY vin")
    assert n == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["vin\tmake\tyear\t", "VIN1\tFord\t1990\t", "VIN2\tHonda\t2005\t"]


def test_print_result_empty_prints_nothing(db, capsys):
    assert db.execute_query_and_print_result("SELECT * FROM Customer") == 0
    assert capsys.readouterr().out == ""


def test_print_result_null_field(db, capsys):
    db.execute_query_and_print_result("SELECT NULL AS x")
    assert capsys.readouterr().out.splitlines() == ["x\t", "null\t"]


def test_return_result_is_strings_without_output(db, seed, capsys):
    seed("Mechanic", (0, "Ann", "Lee", 7))
    rows = db.execute_query_and_return_result("SELECT * FROM Mechanic")
    assert rows == [["0", "Ann", "Lee", "7"]]
    assert capsys.readouterr().out == ""


def test_execute_query_is_existence_check(db, seed):
    assert db.execute_query("SELECT * FROM Car") == 0
    seed("Car", ("A", "m", "m", 1), ("B", "m", "m", 2))
    assert db.execute_query("SELECT * FROM Car") == 1


def test_execute_update_propagates_constraint_violation(db, seed):
    seed("Car", ("VIN1", "Ford", "Escort", 1990))
    with pytest.raises(SQLAlchemyError):
        db.execute_update("INSERT INTO Car VALUES ('VIN1', 'Dup', 'Dup', 2000)")
    # connection stays usable after the failure
    assert db.execute_query_and_return_result("SELECT COUNT(*) FROM Car") == [["1"]]


def test_bound_parameters_keep_quotes_verbatim(db):
    db.execute_update(
        "INSERT INTO Customer VALUES (:id, :fname, :lname, :phone, :address)",
        {"id": 0, "fname": "Shaq", "lname": "O'Neal", "phone": "1", "address": "x'); DROP TABLE Car; --"},
    )
    rows = db.execute_query_and_return_result("SELECT lname, address FROM Customer")
    assert rows == [["O'Neal", "x'); DROP TABLE Car; --"]]
    assert db.execute_query("SELECT * FROM Car") == 0


def test_curr_seq_val_unavailable_returns_minus_one(db):
    assert db.get_curr_seq_val("customer_id_seq") == -1


def test_foreign_keys_enforced_on_sqlite(db):
    with pytest.raises(SQLAlchemyError):
        db.execute_update("INSERT INTO Owns VALUES (0, 42, 'NOPE')")


def test_cleanup_twice_is_harmless():
    gw = Gateway.connect("sqlite://")
    gw.cleanup()
    gw.cleanup()


def test_db_url_from_config(monkeypatch):
    monkeypatch.delenv("SHOP_DB_URL", raising=False)
    url = get_db_url("shopdb", 5432, "alice", {"db_driver": "postgresql+psycopg2", "db_host": "localhost"})
    assert url.drivername == "postgresql+psycopg2"
    assert (url.host, url.port, url.database, url.username) == ("localhost", 5432, "shopdb", "alice")
    assert url.password is None


def test_db_url_env_override(monkeypatch):
    monkeypatch.setenv("SHOP_DB_URL", "sqlite:///shop.db")
    assert get_db_url("shopdb", 5432, "alice", {}) == "sqlite:///shop.db"
