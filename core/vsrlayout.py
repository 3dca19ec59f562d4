"""Byte layouts of the Voter Stake Registry accounts the supply scan reads.

The VSR program is an Anchor program, so every account starts with an 8-byte
discriminator followed by the borsh-serialized struct.
"""
import hashlib

from borsh_construct import CStruct, U8, I8, U64, I64, Bool
from construct import Array, Bytes, Padding
from solders.pubkey import Pubkey

from database.models import (
    DepositEntry,
    Lockup,
    LockupKind,
    Registrar,
    Voter,
    VotingMintConfig,
)

DISCRIMINATOR_SIZE = 8
MAX_VOTING_MINTS = 4
MAX_DEPOSITS = 32

PUBLIC_KEY = Bytes(32)

LOCKUP_LAYOUT = CStruct(
    "start_ts" / I64,
    "end_ts" / I64,
    "kind" / U8,
    "reserved" / Padding(15),
)

DEPOSIT_ENTRY_LAYOUT = CStruct(
    "lockup" / LOCKUP_LAYOUT,
    "amount_deposited_native" / U64,
    "amount_initially_locked_native" / U64,
    "is_used" / Bool,
    "allow_clawback" / Bool,
    "voting_mint_config_idx" / U8,
    "reserved" / Padding(29),
)

VOTER_LAYOUT = CStruct(
    "voter_authority" / PUBLIC_KEY,
    "registrar" / PUBLIC_KEY,
    "deposits" / Array(MAX_DEPOSITS, DEPOSIT_ENTRY_LAYOUT),
    "voter_bump" / U8,
    "voter_weight_record_bump" / U8,
    "reserved" / Padding(94),
)

VOTING_MINT_CONFIG_LAYOUT = CStruct(
    "mint" / PUBLIC_KEY,
    "grant_authority" / PUBLIC_KEY,
    "baseline_vote_weight_scaled_factor" / U64,
    "max_extra_lockup_vote_weight_scaled_factor" / U64,
    "lockup_saturation_secs" / U64,
    "digit_shift" / I8,
    "reserved1" / Padding(7),
    "reserved2" / Padding(7 * 8),
)

REGISTRAR_LAYOUT = CStruct(
    "governance_program_id" / PUBLIC_KEY,
    "realm" / PUBLIC_KEY,
    "realm_governing_token_mint" / PUBLIC_KEY,
    "realm_authority" / PUBLIC_KEY,
    "reserved1" / Padding(32),
    "voting_mints" / Array(MAX_VOTING_MINTS, VOTING_MINT_CONFIG_LAYOUT),
    "time_offset" / I64,
    "bump" / U8,
    "reserved2" / Padding(7),
    "reserved3" / Padding(11 * 8),
)


def account_discriminator(name: str) -> bytes:
    return hashlib.sha256(f"account:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]


VOTER_DISCRIMINATOR = account_discriminator("Voter")
REGISTRAR_DISCRIMINATOR = account_discriminator("Registrar")


def _to_base58(raw: bytes) -> str:
    return str(Pubkey.from_bytes(bytes(raw)))


def _strip_discriminator(data: bytes, discriminator: bytes, layout, name: str) -> bytes:
    data = bytes(data)
    expected_size = DISCRIMINATOR_SIZE + layout.sizeof()
    if len(data) < expected_size:
        raise ValueError(f"{name} account data too short: {len(data)} < {expected_size} bytes")
    if data[:DISCRIMINATOR_SIZE] != discriminator:
        raise ValueError(f"Account data is not a {name} account (discriminator mismatch)")
    return data[DISCRIMINATOR_SIZE:]


def _decode_deposit(parsed) -> DepositEntry:
    return DepositEntry(
        lockup=Lockup(
            start_ts=parsed.lockup.start_ts,
            end_ts=parsed.lockup.end_ts,
            kind=LockupKind(parsed.lockup.kind),
        ),
        amount_deposited_native=parsed.amount_deposited_native,
        amount_initially_locked_native=parsed.amount_initially_locked_native,
        is_used=bool(parsed.is_used),
        allow_clawback=bool(parsed.allow_clawback),
        voting_mint_config_idx=parsed.voting_mint_config_idx,
    )


def decode_voter(data: bytes) -> Voter:
    """Decode a raw ``Voter`` account, discriminator included."""
    parsed = VOTER_LAYOUT.parse(_strip_discriminator(data, VOTER_DISCRIMINATOR, VOTER_LAYOUT, "Voter"))
    return Voter(
        voter_authority=_to_base58(parsed.voter_authority),
        registrar=_to_base58(parsed.registrar),
        deposits=[_decode_deposit(deposit) for deposit in parsed.deposits],
    )


def decode_registrar(data: bytes) -> Registrar:
    """Decode a raw ``Registrar`` account, discriminator included."""
    parsed = REGISTRAR_LAYOUT.parse(
        _strip_discriminator(data, REGISTRAR_DISCRIMINATOR, REGISTRAR_LAYOUT, "Registrar")
    )
    return Registrar(
        governance_program_id=_to_base58(parsed.governance_program_id),
        realm=_to_base58(parsed.realm),
        realm_governing_token_mint=_to_base58(parsed.realm_governing_token_mint),
        realm_authority=_to_base58(parsed.realm_authority),
        voting_mints=[
            VotingMintConfig(
                mint=_to_base58(config.mint),
                grant_authority=_to_base58(config.grant_authority),
                baseline_vote_weight_scaled_factor=config.baseline_vote_weight_scaled_factor,
                max_extra_lockup_vote_weight_scaled_factor=config.max_extra_lockup_vote_weight_scaled_factor,
                lockup_saturation_secs=config.lockup_saturation_secs,
                digit_shift=config.digit_shift,
            )
            for config in parsed.voting_mints
        ],
        time_offset=parsed.time_offset,
        bump=parsed.bump,
    )
