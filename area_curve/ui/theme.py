from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    bg: str              # fenêtre
    surface: str         # fond du graphe
    text: str
    text_muted: str
    stroke: str          # contour de la courbe
    gradient_top: str    # remplissage en haut du graphe
    gradient_bottom: str # remplissage sur la ligne de base
    marker_outer: str
    marker_inner: str
    fill_alpha: float


LIGHT = Theme(
    name="light",
    bg="#ffffff",
    surface="#ffffff",
    text="#0f172a",
    text_muted="#475569",
    stroke="grey",
    gradient_top="red",
    gradient_bottom="black",
    marker_outer="red",
    marker_inner="black",
    fill_alpha=1.0,
)


DARK = Theme(
    name="dark",
    bg="#0f172a",
    surface="#1f2937",
    text="#e5e7eb",
    text_muted="#9ca3af",
    stroke="#9ca3af",
    gradient_top="#ef4444",
    gradient_bottom="#111827",
    marker_outer="#ef4444",
    marker_inner="#111827",
    fill_alpha=0.9,
)


THEMES = {
    "light": LIGHT,
    "dark": DARK,
}
