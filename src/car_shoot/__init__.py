"""Car Shoot: turret-versus-cars arcade shooter."""

__version__ = "0.1.0"
