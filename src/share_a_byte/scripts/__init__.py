"""Operational scripts for Share-a-Byte."""
