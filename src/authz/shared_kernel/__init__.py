"""Shared Kernel module.

Components explicitly shared across bounded contexts: the data-access
capabilities resources expose, and the policy resolution built on them.
Changes here affect every context and should be coordinated.
"""
