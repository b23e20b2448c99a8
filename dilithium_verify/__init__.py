"""Verification of CRYSTALS-Dilithium signatures in pure Python, with SHAKE, NTT and Base64 helpers."""

__version__ = "0.1.0"