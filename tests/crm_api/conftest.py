"""
pytest configuration and fixtures for the CRM API test suite
Each test gets a fresh in-memory backend injected into the application.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from app import create_app
from fake_backend import FakeSupabase


@pytest.fixture
def fake_backend():
    return FakeSupabase()


@pytest.fixture
def client(fake_backend):
    """HTTP client for an app wired to the fake backend"""
    app = create_app(backend=fake_backend)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def individual_contact():
    return {
        "nom": "Martin",
        "prenom": "Claire",
        "email": "claire.martin@x.com",
        "telephone": "0612345678",
        "types": {"particulier": True, "professionnel": False},
        "statut": "prospect"
    }


@pytest.fixture
def professional_contact():
    return {
        "nom": "Durand",
        "prenom": "Paul",
        "email": "paul.durand@x.com",
        "telephone": "0698765432",
        "types": {"particulier": False, "professionnel": True, "professionalType": "artisan"},
        "statut": "client",
        "entreprise": "Durand Menuiserie",
        "siret": "12345678901234"
    }


@pytest.fixture
def contract_payload():
    return {
        "clientId": "1",
        "type": "habitation",
        "categorie": "particulier",
        "montantAnnuel": 480.5,
        "dateDebut": "2024-01-01T00:00:00Z",
        "dateFin": "2025-01-01T00:00:00Z",
        "partenaire": "AXA",
        "commissionPremiereAnnee": 30,
        "commissionAnneesSuivantes": 10,
        "fraisDossier": 50,
        "fraisDossierRecurrent": False
    }


@pytest.fixture
def partner_payload():
    return {
        "nom": "AXA",
        "type": "assureur",
        "produits": ["auto", "habitation"],
        "statut": "actif",
        "contactPrincipal": "Jeanne Petit",
        "email": "partenariats@axa.fr",
        "telephone": "0140000000",
        "siteWeb": "https://www.axa.fr",
        "intranetUrl": ""
    }
