"""Static keyword tables driving note classification.

Bucket order and word order inside each bucket decide ambiguous text:
the first trigger word found wins, so the tuples below must keep their
declared order.
"""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """Closed set of note colors. ``GRAY`` is the fallback."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    GRAY = "gray"

    @property
    def label(self) -> str:
        """Human readable name shown next to the color dot."""
        return COLOR_LABELS[self]


COLOR_LABELS: dict[Color, str] = {
    Color.RED: "Rojo (Tareas)",
    Color.BLUE: "Azul (Ideas)",
    Color.GREEN: "Verde (Compras)",
    Color.GRAY: "Gris (General)",
}

# (color, trigger words) scanned top to bottom
COLOR_KEYWORDS: tuple[tuple[Color, tuple[str, ...]], ...] = (
    (
        Color.RED,
        ("entregar", "pendiente", "tarea", "urgente", "hacer", "deadline", "importante"),
    ),
    (
        Color.BLUE,
        ("idea", "recordar", "pensar", "inspiración", "notas", "brainstorm", "concepto"),
    ),
    (
        Color.GREEN,
        ("comprar", "pagar", "pago", "recibo", "mercado", "tienda", "dinero", "factura"),
    ),
)

TAG_KEYWORDS: tuple[str, ...] = (
    "universidad",
    "trabajo",
    "compras",
    "salud",
    "personal",
    "familia",
    "proyecto",
    "estudio",
    "ejercicio",
    "viaje",
)

DEFAULT_COLOR = Color.GRAY
DEFAULT_TAG = "General"
MAX_SUGGESTED_TAGS = 3
MAX_TAGS = 5
UNTITLED = "Sin título"

# Filter sentinel. Stored tags are capitalized, so no tag can equal it.
ALL = "all"
