"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including the ISO 4217 Currency registry and Money values kept as exact
integer counts of minor units, with proportional allocation that never
creates or loses a minor unit.
"""
