from dataclasses import dataclass

@dataclass
class Config:
    PSY_MINT_ADDRESS: str = "PsyFiqqjiv41G7o5SMRzDJCu4psptThNR2GtfeGHfSq"
    FOUNDATION_ADDRESS: str = "6c33US7ErPmLXZog9SyChQUYUrrJY51k4GmzdhrbhNnD"
    VOTER_STAKE_REGISTRY_PROGRAM_ID: str = "VotEn9AWwTFtJPJSMV5F9jsMY6QwWM5qn3XP9PATGW7"
    SPL_GOVERNANCE_PROGRAM_ID: str = "GovHgfDPyQ1GwazJTDY2avSVY8GGcpmCapmmCsymRaGe"
    PSY_REALM_ID: str = "FiG6YoqWnVzUmxFNukcRVXZC51HvLr6mts8nxcm7ScR8"
    PSY_DAO_GRANT_ACCOUNT: str = "CcNUW7KDCdaUY6rNqYJBmTKYn66RjYTVyPUqCNEiALdp"
    REGISTRAR_SEED: bytes = b"registrar"
    VOTER_REGISTRAR_OFFSET: int = 40  # discriminator + voter_authority
