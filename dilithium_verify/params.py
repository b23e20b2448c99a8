"""Dilithium parameter sets and the sizes derived from them."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "SEEDBYTES",
    "CRHBYTES",
    "TRBYTES",
    "RNDBYTES",
    "N",
    "Q",
    "D",
    "ROOT_OF_UNITY",
    "POLYT1_PACKEDBYTES",
    "POLYT0_PACKEDBYTES",
    "DEFAULT_MODE",
    "ParameterSet",
    "get_params",
]

SEEDBYTES = 32
CRHBYTES = 64
TRBYTES = 64
RNDBYTES = 32
N = 256
Q = 8380417
D = 13
ROOT_OF_UNITY = 1753

POLYT1_PACKEDBYTES = 320
POLYT0_PACKEDBYTES = 416

DEFAULT_MODE = 5

_POLYZ_BYTES = {1 << 17: 576, 1 << 19: 640}
_POLYW1_BYTES = {(Q - 1) // 88: 192, (Q - 1) // 32: 128}
_POLYETA_BYTES = {2: 96, 4: 128}


def _lookup(table: dict[int, int], key: int, what: str) -> int:
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"unsupported {what}: {key}") from None


@dataclass(frozen=True)
class ParameterSet:
    """One Dilithium security level."""

    mode: int
    name: str
    k: int
    l: int  # noqa: E741
    eta: int
    tau: int
    beta: int
    gamma1: int
    gamma2: int
    omega: int
    ctilde_bytes: int

    @property
    def polyz_packed_bytes(self) -> int:
        return _lookup(_POLYZ_BYTES, self.gamma1, "gamma1")

    @property
    def polyw1_packed_bytes(self) -> int:
        return _lookup(_POLYW1_BYTES, self.gamma2, "gamma2")

    @property
    def polyeta_packed_bytes(self) -> int:
        return _lookup(_POLYETA_BYTES, self.eta, "eta")

    @property
    def polyvech_packed_bytes(self) -> int:
        return self.omega + self.k

    @property
    def public_key_bytes(self) -> int:
        return SEEDBYTES + self.k * POLYT1_PACKEDBYTES

    @property
    def secret_key_bytes(self) -> int:
        return (
            2 * SEEDBYTES
            + TRBYTES
            + self.l * self.polyeta_packed_bytes
            + self.k * self.polyeta_packed_bytes
            + self.k * POLYT0_PACKEDBYTES
        )

    @property
    def signature_bytes(self) -> int:
        return (
            self.ctilde_bytes
            + self.l * self.polyz_packed_bytes
            + self.polyvech_packed_bytes
        )


_PARAMETER_SETS = {
    2: ParameterSet(
        mode=2, name="Dilithium2", k=4, l=4, eta=2, tau=39, beta=78,
        gamma1=1 << 17, gamma2=(Q - 1) // 88, omega=80, ctilde_bytes=32,
    ),
    3: ParameterSet(
        mode=3, name="Dilithium3", k=6, l=5, eta=4, tau=49, beta=196,
        gamma1=1 << 19, gamma2=(Q - 1) // 32, omega=55, ctilde_bytes=48,
    ),
    5: ParameterSet(
        mode=5, name="Dilithium5", k=8, l=7, eta=2, tau=60, beta=120,
        gamma1=1 << 19, gamma2=(Q - 1) // 32, omega=75, ctilde_bytes=64,
    ),
}


def get_params(mode: int = DEFAULT_MODE) -> ParameterSet:
    """Return the parameter set for security mode 2, 3 or 5."""
    try:
        return _PARAMETER_SETS[mode]
    except (KeyError, TypeError):
        raise ValueError(f"unknown Dilithium mode: {mode!r}") from None