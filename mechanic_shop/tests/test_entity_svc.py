from mechanic_shop.services.car_svc import add_car
from mechanic_shop.services.customer_svc import add_customer
from mechanic_shop.services.mechanic_svc import add_mechanic


def test_add_customer_uses_row_count_as_id(db, answers, capsys):
    answers("John", "Doe", "555-1234", "1 Main St")
    add_customer(db)
    assert db.execute_query_and_return_result("SELECT * FROM Customer") == [
        ["0", "John", "Doe", "555-1234", "1 Main St"]
    ]
    out = capsys.readouterr().out
    assert "total row(s): 0" in out
    assert "total row(s): 1" in out
    assert "\tSuccess!" in out

    answers("John", "Doe", "555-1234", "1 Main St")
    add_customer(db)
    rows = db.execute_query_and_return_result("SELECT * FROM Customer ORDER BY id")
    assert [r[0] for r in rows] == ["0", "1"]
    assert rows[1] == ["1", "John", "Doe", "555-1234", "1 Main St"]


def test_add_customer_reprompts_bad_first_name(db, answers, capsys):
    answers("", "x" * 33, "Jane", "Roe", "555-0000", "2 Elm St")
    add_customer(db)
    err = capsys.readouterr().err
    assert err.count("Customer's first name can not be null (empty) or exceed 32 characters.") == 2
    assert db.execute_query_and_return_result("SELECT fname FROM Customer") == [["Jane"]]


def test_add_customer_rejects_long_phone(db, answers, capsys):
    answers("Jane", "Roe", "5" * 14, "555-0000", "2 Elm St")
    add_customer(db)
    assert "phone number can not be null (empty) or exceed 13 characters." in capsys.readouterr().err
    assert db.execute_query_and_return_result("SELECT phone FROM Customer") == [["555-0000"]]


def test_add_mechanic_reprompts_non_integer_experience(db, answers, capsys):
    answers("Ann", "Lee", "seven", "7")
    add_mechanic(db)
    assert 'must be an integer, got "seven"' in capsys.readouterr().err
    assert db.execute_query_and_return_result("SELECT * FROM Mechanic") == [["0", "Ann", "Lee", "7"]]


def test_add_car_inserts_verbatim(db, answers, capsys):
    answers("1HGCM82633A0043", "Honda", "Accord", "2003")
    add_car(db)
    assert db.execute_query_and_return_result("SELECT * FROM Car") == [
        ["1HGCM82633A0043", "Honda", "Accord", "2003"]
    ]
    assert "total row(s): 1" in capsys.readouterr().out


def test_add_car_duplicate_vin_reports_and_returns(db, seed, answers, capsys):
    seed("Car", ("VIN1", "Ford", "Escort", 1990))
    answers("VIN1", "Dup", "Dup", "2000")
    add_car(db)
    captured = capsys.readouterr()
    assert captured.err.strip() != ""
    assert "Success!" not in captured.out
    assert db.execute_query_and_return_result("SELECT make FROM Car") == [["Ford"]]
