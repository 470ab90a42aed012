"""Orbital mechanics and scene-update engine for the Solar System Orrery."""
