"""Servicios del Core (operaciones de lectura validada)."""
