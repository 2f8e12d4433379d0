"""Servicios del Core: secuencia de ciclo de vida y sesión interactiva."""
