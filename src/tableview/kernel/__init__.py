"""Kernel – errors and record types shared by every layer."""
