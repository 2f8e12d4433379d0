"""Modelos del dominio.

Aquí viven los registros de request/response que el daemon entiende, con
los nombres de campo exactos del wire (Pydantic v2, alias en PascalCase).
"""
