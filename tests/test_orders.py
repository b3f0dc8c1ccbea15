"""
Order lifecycle over HTTP: DRAFT -> PAID -> CANCELED.
"""
from models.menu_item_model import MenuItem
from models.payment_model import Payment


def _create(client, auth, seed, who="member_in", restaurant=None):
    r = client.post("/api/orders", json={"restaurantId": restaurant or seed.spice}, headers=auth(who))
    assert r.status_code == 201, r.text
    return r.json()


def _add(client, auth, order_id, menu_item_id, quantity=1, who="member_in"):
    return client.post(
        f"/api/orders/{order_id}/items",
        json={"menuItemId": menu_item_id, "quantity": quantity},
        headers=auth(who),
    )


def _paid_order(client, auth, seed):
    order = _create(client, auth, seed)
    _add(client, auth, order["id"], seed.butter_chicken, 2)
    r = client.post(
        f"/api/orders/{order['id']}/checkout",
        json={"paymentMethodId": seed.visa},
        headers=auth("manager_in"),
    )
    assert r.status_code == 200, r.text
    return r.json()


class TestCreateOrder:

    def test_new_order_is_empty_draft(self, client, auth, seed):
        order = _create(client, auth, seed)
        assert order["status"] == "DRAFT"
        assert order["totalAmountCents"] == 0
        assert order["items"] == []
        assert order["currency"] == "INR"
        assert order["country"] == "IN"
        assert order["restaurant"]["name"] == "Spice Paradise"

    def test_us_order_uses_usd(self, client, auth, seed):
        order = _create(client, auth, seed, who="member_us", restaurant=seed.diner)
        assert order["currency"] == "USD"
        assert order["country"] == "US"

    def test_inactive_restaurant_is_not_found(self, client, auth, seed):
        r = client.post("/api/orders", json={"restaurantId": seed.closed}, headers=auth("member_in"))
        assert r.status_code == 404

    def test_other_country_restaurant_is_not_found(self, client, auth, seed):
        r = client.post("/api/orders", json={"restaurantId": seed.spice}, headers=auth("member_us"))
        assert r.status_code == 404
        assert r.json()["message"] == "Restaurant not found"

    def test_admin_can_order_anywhere(self, client, auth, seed):
        order = _create(client, auth, seed, who="admin", restaurant=seed.diner)
        assert order["currency"] == "USD"

    def test_requires_token(self, client, seed):
        r = client.post("/api/orders", json={"restaurantId": seed.spice})
        assert r.status_code == 401


class TestOrderItems:

    def test_add_item_recomputes_total(self, client, auth, seed):
        order = _create(client, auth, seed)
        r = _add(client, auth, order["id"], seed.butter_chicken, 2)
        assert r.status_code == 201
        body = r.json()
        assert body["totalAmountCents"] == 70000
        assert body["items"][0]["unitPriceCents"] == 35000
        assert body["items"][0]["lineTotalCents"] == 70000
        assert body["items"][0]["menuItemName"] == "Butter Chicken"

    def test_adding_same_item_twice_increments_quantity(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan, 1)
        body = _add(client, auth, order["id"], seed.naan, 2).json()
        assert len(body["items"]) == 1
        assert body["items"][0]["quantity"] == 3
        assert body["totalAmountCents"] == 15000

    def test_update_quantity(self, client, auth, seed):
        order = _create(client, auth, seed)
        item_id = _add(client, auth, order["id"], seed.butter_chicken).json()["items"][0]["id"]
        r = client.patch(
            f"/api/orders/{order['id']}/items/{item_id}",
            json={"quantity": 4},
            headers=auth("member_in"),
        )
        assert r.status_code == 200
        assert r.json()["totalAmountCents"] == 140000

    def test_remove_item_recomputes_total(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.butter_chicken)
        body = _add(client, auth, order["id"], seed.naan, 2).json()
        naan_line = next(it for it in body["items"] if it["menuItemId"] == seed.naan)

        r = client.delete(f"/api/orders/{order['id']}/items/{naan_line['id']}", headers=auth("member_in"))
        assert r.status_code == 200
        assert r.json()["totalAmountCents"] == 35000
        assert len(r.json()["items"]) == 1

    def test_remove_unknown_item(self, client, auth, seed):
        order = _create(client, auth, seed)
        r = client.delete(f"/api/orders/{order['id']}/items/nope", headers=auth("member_in"))
        assert r.status_code == 404

    def test_item_from_other_restaurant_rejected(self, client, auth, seed):
        order = _create(client, auth, seed, who="admin")
        r = _add(client, auth, order["id"], seed.burger, who="admin")
        assert r.status_code == 400
        assert r.json()["message"] == "Menu item does not belong to the order restaurant"

    def test_unavailable_item_rejected(self, client, auth, seed):
        order = _create(client, auth, seed)
        r = _add(client, auth, order["id"], seed.sold_out)
        assert r.status_code == 400

    def test_unknown_menu_item(self, client, auth, seed):
        order = _create(client, auth, seed)
        assert _add(client, auth, order["id"], "missing").status_code == 404

    def test_zero_quantity_is_validation_error(self, client, auth, seed):
        order = _create(client, auth, seed)
        r = _add(client, auth, order["id"], seed.naan, 0)
        assert r.status_code == 400
        body = r.json()
        assert body["message"] == "Validation error"
        assert body["validationErrors"][0]["field"] == "quantity"

    def test_items_frozen_after_checkout(self, client, auth, seed):
        order = _paid_order(client, auth, seed)
        r = _add(client, auth, order["id"], seed.naan)
        assert r.status_code == 422
        item_id = order["items"][0]["id"]
        r = client.delete(f"/api/orders/{order['id']}/items/{item_id}", headers=auth("member_in"))
        assert r.status_code == 422


class TestCheckout:

    def test_manager_checks_out(self, client, auth, seed, db_session):
        order = _paid_order(client, auth, seed)
        assert order["status"] == "PAID"
        assert order["paymentMethodId"] == seed.visa
        assert order["totalAmountCents"] == 70000

        payment = db_session.query(Payment).filter(Payment.order_id == order["id"]).one()
        assert payment.status == "SUCCEEDED"
        assert payment.amount_cents == 70000
        assert payment.currency == "INR"
        assert payment.transaction_id.startswith("mock_txn_")

    def test_member_cannot_checkout(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.visa},
            headers=auth("member_in"),
        )
        assert r.status_code == 403
        assert r.json()["error"] == "Forbidden"

    def test_empty_order_cannot_checkout(self, client, auth, seed):
        order = _create(client, auth, seed)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.visa},
            headers=auth("manager_in"),
        )
        assert r.status_code == 422

    def test_second_checkout_rejected(self, client, auth, seed):
        order = _paid_order(client, auth, seed)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.visa},
            headers=auth("manager_in"),
        )
        assert r.status_code == 422
        assert r.json()["message"] == "Order status must be DRAFT for checkout"

    def test_inactive_payment_method(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.expired},
            headers=auth("manager_in"),
        )
        assert r.status_code == 400

    def test_payment_method_for_other_country(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.us_card},
            headers=auth("manager_in"),
        )
        assert r.status_code == 400
        assert r.json()["message"] == "Payment method is not valid for the order country"

    def test_unknown_payment_method(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": "missing"},
            headers=auth("manager_in"),
        )
        assert r.status_code == 404

    def test_manager_cannot_checkout_other_country(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan)
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.visa},
            headers=auth("manager_us"),
        )
        assert r.status_code == 404


class TestCancel:

    def test_cancel_paid_order(self, client, auth, seed, db_session):
        order = _paid_order(client, auth, seed)
        r = client.post(f"/api/orders/{order['id']}/cancel", headers=auth("manager_in"))
        assert r.status_code == 200
        assert r.json()["status"] == "CANCELED"

        payment = db_session.query(Payment).filter(Payment.order_id == order["id"]).one()
        assert payment.status == "CANCELED"

    def test_draft_cannot_be_canceled(self, client, auth, seed):
        order = _create(client, auth, seed)
        r = client.post(f"/api/orders/{order['id']}/cancel", headers=auth("admin"))
        assert r.status_code == 422
        assert r.json()["message"] == "Only PAID orders can be canceled"

    def test_canceled_is_final(self, client, auth, seed):
        order = _paid_order(client, auth, seed)
        client.post(f"/api/orders/{order['id']}/cancel", headers=auth("manager_in"))
        r = client.post(f"/api/orders/{order['id']}/cancel", headers=auth("manager_in"))
        assert r.status_code == 422
        r = client.post(
            f"/api/orders/{order['id']}/checkout",
            json={"paymentMethodId": seed.visa},
            headers=auth("manager_in"),
        )
        assert r.status_code == 422

    def test_member_cannot_cancel(self, client, auth, seed):
        order = _paid_order(client, auth, seed)
        r = client.post(f"/api/orders/{order['id']}/cancel", headers=auth("member_in"))
        assert r.status_code == 403


class TestReadOrders:

    def test_members_only_see_their_country(self, client, auth, seed):
        in_order = _create(client, auth, seed)
        us_order = _create(client, auth, seed, who="member_us", restaurant=seed.diner)

        ids = [o["id"] for o in client.get("/api/orders", headers=auth("member_us")).json()]
        assert ids == [us_order["id"]]

        r = client.get(f"/api/orders/{in_order['id']}", headers=auth("member_us"))
        assert r.status_code == 404

    def test_admin_sees_all_newest_first(self, client, auth, seed):
        first = _create(client, auth, seed)
        second = _create(client, auth, seed, who="member_us", restaurant=seed.diner)

        ids = [o["id"] for o in client.get("/api/orders", headers=auth("admin")).json()]
        assert set(ids) == {first["id"], second["id"]}

    def test_get_order_with_items(self, client, auth, seed):
        order = _create(client, auth, seed)
        _add(client, auth, order["id"], seed.naan, 2)
        r = client.get(f"/api/orders/{order['id']}", headers=auth("manager_in"))
        assert r.status_code == 200
        assert r.json()["items"][0]["quantity"] == 2


class TestOrderCurrency:

    def test_menu_item_in_other_currency_rejected(self, client, auth, seed, db_session):
        db_session.get(MenuItem, seed.naan).currency = "USD"
        db_session.commit()

        order = _create(client, auth, seed)
        r = _add(client, auth, order["id"], seed.naan)
        assert r.status_code == 400
        assert r.json()["message"] == "Menu item currency does not match the order currency"

        r = client.get(f"/api/orders/{order['id']}", headers=auth("member_in"))
        assert r.json()["items"] == []
        assert r.json()["totalAmountCents"] == 0
