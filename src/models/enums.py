"""
Enum definitions for the brokerage CRM backend
"""

from enum import Enum

# Contact-related enums
class ContactStatus(str, Enum):
    PROSPECT = "prospect"
    CLIENT = "client"

# Contract-related enums
class ContractType(str, Enum):
    """Insurance lines sold by the brokerage"""
    AUTO = "auto"
    HABITATION = "habitation"
    SANTE = "santé"
    PREVOYANCE = "prévoyance"
    MULTIRISQUE = "multirisque"
    RESPONSABILITE_CIVILE = "responsabilité civile"

class ContractCategory(str, Enum):
    PARTICULIER = "particulier"
    PROFESSIONNEL = "professionnel"

# Partner-related enums
class PartnerType(str, Enum):
    ASSUREUR = "assureur"
    COURTIER_GROSSISTE = "courtier grossiste"

class PartnerStatus(str, Enum):
    ACTIF = "actif"
    INACTIF = "inactif"
