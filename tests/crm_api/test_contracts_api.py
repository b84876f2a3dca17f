"""
Contract endpoint tests, including owner promotion on creation
"""

import json
import re


class TestContractsCRUD:

    def test_create_generates_reference(self, client, contract_payload):
        response = client.post("/api/contrats/", json=contract_payload)

        assert response.status_code == 201
        assert re.fullmatch(r"CONT-\d{4}_\d{2}_\d{4}", response.json()["reference"])

    def test_create_promotes_prospect_owner(self, client, fake_backend, contract_payload, individual_contact):
        owner = fake_backend.seed("contacts", individual_contact)[0]
        contract_payload["clientId"] = str(owner["id"])

        response = client.post("/api/contrats/", json=contract_payload)

        assert response.status_code == 201
        assert fake_backend.tables["contacts"][0]["statut"] == "client"

    def test_create_leaves_client_owner_untouched(self, client, fake_backend, contract_payload, professional_contact):
        owner = fake_backend.seed("contacts", professional_contact)[0]
        contract_payload["clientId"] = str(owner["id"])

        client.post("/api/contrats/", json=contract_payload)

        assert not any(table == "contacts" and op == "update" for table, op, _ in fake_backend.calls)

    def test_promotion_failure_keeps_contract(self, client, fake_backend, contract_payload, individual_contact):
        owner = fake_backend.seed("contacts", individual_contact)[0]
        contract_payload["clientId"] = str(owner["id"])
        fake_backend.fail("contacts", "update", "timeout")

        response = client.post("/api/contrats/", json=contract_payload)

        assert response.status_code == 201
        assert len(fake_backend.tables["contrats"]) == 1

    def test_end_date_must_follow_start(self, client, fake_backend, contract_payload):
        contract_payload["dateFin"] = contract_payload["dateDebut"]

        response = client.post("/api/contrats/", json=contract_payload)

        assert response.status_code == 400
        assert [d["field"] for d in response.json()["details"]] == ["dateFin"]
        assert "contrats" not in fake_backend.tables

    def test_non_finite_amount_returns_400(self, client, fake_backend, contract_payload):
        contract_payload["fraisDossier"] = float("inf")

        # Python's json module writes and reads the Infinity literal
        response = client.post(
            "/api/contrats/",
            content=json.dumps(contract_payload),
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert [d["field"] for d in response.json()["details"]] == ["fraisDossier"]
        assert "contrats" not in fake_backend.tables

    def test_list_latest_start_first(self, client, contract_payload):
        for year in [2021, 2023, 2022]:
            payload = dict(contract_payload, dateDebut=f"{year}-01-01T00:00:00Z", dateFin=f"{year + 1}-01-01T00:00:00Z")
            client.post("/api/contrats/", json=payload)

        response = client.get("/api/contrats/")

        assert [contract["dateDebut"][:4] for contract in response.json()] == ["2023", "2022", "2021"]

    def test_get_update_delete(self, client, contract_payload):
        contract_id = client.post("/api/contrats/", json=contract_payload).json()["id"]

        assert client.get(f"/api/contrats/{contract_id}").status_code == 200

        contract_payload["montantAnnuel"] = 999
        updated = client.put(f"/api/contrats/{contract_id}", json=contract_payload)
        assert updated.status_code == 200
        assert updated.json()["montantAnnuel"] == 999

        assert client.delete(f"/api/contrats/{contract_id}").status_code == 204
        missing = client.get(f"/api/contrats/{contract_id}")
        assert missing.status_code == 404
        assert missing.json() == {"error": "Contrat non trouvé"}
