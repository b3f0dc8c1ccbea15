class TestPaymentMethods:

    def test_list_active_default_first(self, client, auth, seed):
        r = client.get("/api/payment-methods", headers=auth("member_in"))
        assert r.status_code == 200
        labels = [m["label"] for m in r.json()]
        assert labels == ["Mock Visa Card", "US Card"]
        assert r.json()[0]["isDefault"] is True

    def test_member_cannot_create(self, client, auth, seed):
        r = client.post("/api/payment-methods", json={"label": "Mine"}, headers=auth("member_in"))
        assert r.status_code == 403

    def test_create_generates_last4(self, client, auth, seed):
        r = client.post("/api/payment-methods", json={"label": "Team Card", "expMonth": 3, "expYear": 2030},
                        headers=auth("admin"))
        assert r.status_code == 201
        body = r.json()
        assert body["brand"] == "MOCK"
        assert body["provider"] == "MOCK"
        assert len(body["last4"]) == 4 and body["last4"].isdigit()
        assert body["createdByUserId"] == seed.users["admin"]

    def test_invalid_expiry_month(self, client, auth, seed):
        r = client.post("/api/payment-methods", json={"label": "Bad", "expMonth": 13}, headers=auth("admin"))
        assert r.status_code == 400

    def test_new_default_clears_previous(self, client, auth, seed):
        r = client.post("/api/payment-methods", json={"label": "New Default", "last4": "9999", "isDefault": True},
                        headers=auth("admin"))
        assert r.status_code == 201

        methods = client.get("/api/payment-methods", headers=auth("admin")).json()
        defaults = [m["label"] for m in methods if m["isDefault"]]
        assert defaults == ["New Default"]

    def test_update_default_and_deactivate(self, client, auth, seed):
        r = client.patch(f"/api/payment-methods/{seed.us_card}", json={"isDefault": True}, headers=auth("admin"))
        assert r.status_code == 200
        methods = client.get("/api/payment-methods", headers=auth("admin")).json()
        assert [m["id"] for m in methods if m["isDefault"]] == [seed.us_card]

        r = client.patch(f"/api/payment-methods/{seed.visa}", json={"active": False}, headers=auth("admin"))
        assert r.json()["active"] is False
        ids = [m["id"] for m in client.get("/api/payment-methods", headers=auth("admin")).json()]
        assert seed.visa not in ids

    def test_deactivating_default_clears_flag(self, client, auth, seed):
        r = client.patch(f"/api/payment-methods/{seed.visa}", json={"active": False}, headers=auth("admin"))
        assert r.status_code == 200
        assert r.json()["active"] is False
        assert r.json()["isDefault"] is False

        # reactivating does not bring the old default back
        r = client.patch(f"/api/payment-methods/{seed.visa}", json={"active": True}, headers=auth("admin"))
        assert r.json()["isDefault"] is False

    def test_inactive_method_cannot_be_default(self, client, auth, seed):
        r = client.patch(f"/api/payment-methods/{seed.expired}", json={"isDefault": True}, headers=auth("admin"))
        assert r.status_code == 400
        assert r.json()["message"] == "An inactive payment method cannot be the default"

        r = client.patch(f"/api/payment-methods/{seed.expired}", json={"active": True, "isDefault": True},
                         headers=auth("admin"))
        assert r.status_code == 200
        methods = client.get("/api/payment-methods", headers=auth("admin")).json()
        assert [m["id"] for m in methods if m["isDefault"]] == [seed.expired]

    def test_update_unknown(self, client, auth, seed):
        r = client.patch("/api/payment-methods/missing", json={"label": "x"}, headers=auth("admin"))
        assert r.status_code == 404
