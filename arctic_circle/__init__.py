"""Domino-shuffling simulation of the Aztec diamond and its arctic circle."""
