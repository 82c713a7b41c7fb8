"""
unitsync: convergencia declarativa de units de systemd.

Renderiza cada servicio declarado desde su plantilla, lo compara con la unit
en vivo y con la última huella registrada, y aplica solo lo necesario.
"""

__version__ = "1.0.0"
