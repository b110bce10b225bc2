from __future__ import annotations

# Report statements, kept verbatim for compatibility with the deployed schema.

BILL_LESS_THAN_100 = (
    "SELECT C.fname, C.lname, CR.date, CR.comment, CR.bill FROM Customer C, Closed_Request CR "
    "WHERE C.id IN (SELECT SR.customer_ID FROM Service_Request SR WHERE CR.bill < 100 AND CR.wid = SR.rid)"
)

MORE_THAN_20_CARS = (
    "SELECT C.fname, C.lname FROM Customer C "
    "WHERE C.id IN (SELECT O.customer_id FROM Owns O GROUP BY O.customer_id HAVING COUNT(O.car_vin) > 20)"
)

CARS_BEFORE_1995_UNDER_50000 = (
    "SELECT C.make, C.model, C.year FROM Car C "
    "WHERE C.vin IN (SELECT SR.car_vin FROM Service_Request SR WHERE SR.odometer < 50000) AND C.year < 1995"
)

# Ties keep the backend's storage order; no secondary sort key.
K_MOST_SERVICED_CARS = (
    "SELECT C.make, C.model, C.year, COUNT(C.vin) AS numServiceOrders FROM Car C, Service_Request SR "
    "WHERE C.vin = SR.car_vin GROUP BY C.vin ORDER BY numServiceOrders DESC LIMIT :limit"
)

CUSTOMERS_BY_TOTAL_BILL = (
    "SELECT C.fname, C.lname, SUM(CR.bill) AS totalBill FROM Customer C, Closed_Request CR "
    "WHERE EXISTS (SELECT * FROM Service_Request SR WHERE SR.rid = CR.wid AND C.id = SR.customer_id) "
    "GROUP BY C.id ORDER BY TotalBill DESC"
)
