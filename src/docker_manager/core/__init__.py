"""Core: dominio, contratos y servicios.

No importa adaptadores concretos; solo abstracciones (`core.interfaces`).
"""
