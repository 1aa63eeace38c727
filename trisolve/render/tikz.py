"""TikZ renderer for solved-triangle diagrams."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..layout import DiagramGeometry
from ..printer import format_value
from ..state import Snapshot

PX_PER_CM = 37.795275591

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\tikzset{
  carrier/.style={line width=1.2pt, draw=blue!70!black, line join=round},
  body/.style={fill=blue!8},
  aux/.style={line width=0.8pt, dash pattern=on 3pt off 3pt},
  pill/.style={rounded corners=2pt, fill=white, fill opacity=0.8, text opacity=1,
    font=\footnotesize\bfseries, inner sep=2pt},
  ptlabel/.style={font=\small\bfseries},
}
\begin{document}
\begin{minipage}[t]{%(width)s}
%(header)s
%(picture)s
\end{minipage}
\end{document}
"""

_LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "$": r"\$",
}


def latex_escape(text: str) -> str:
    return "".join(_LATEX_SPECIALS.get(ch, ch) for ch in text)


def _cm(diagram: DiagramGeometry, point: Sequence[float]) -> str:
    # screen y grows downward, TikZ y grows upward
    x = float(point[0]) / PX_PER_CM
    y = (diagram.height - float(point[1])) / PX_PER_CM
    return f"({format_value(x)}, {format_value(y)})"


def generate_tikz_code(diagram: DiagramGeometry) -> str:
    """Return a ``tikzpicture`` drawing ``diagram`` at its on-screen size."""

    lines: List[str] = ["\\begin{tikzpicture}"]
    lines.append(
        "  \\path[use as bounding box] (0, 0) rectangle {corner};".format(
            corner=_cm(diagram, (diagram.width, 0.0))
        )
    )
    for name, point in diagram.vertices.items():
        lines.append(f"  \\coordinate ({name}) at {_cm(diagram, point)};")
    lines.append("")
    lines.append("  \\fill[body] (A) -- (B) -- (C) -- cycle;")

    if diagram.altitude is not None:
        lines.append(
            f"  \\draw[aux, draw=blue!60] {_cm(diagram, diagram.altitude.start)} -- "
            f"{_cm(diagram, diagram.altitude.end)};"
        )
    if diagram.incircle is not None:
        lines.append(
            f"  \\draw[line width=0.8pt, draw=green!60!black] {_cm(diagram, diagram.incircle.center)} "
            f"circle ({format_value(diagram.incircle.radius / PX_PER_CM)});"
        )
    if diagram.circumcircle is not None:
        lines.append(
            f"  \\draw[line width=0.8pt, draw=violet] {_cm(diagram, diagram.circumcircle.center)} "
            f"circle ({format_value(diagram.circumcircle.radius / PX_PER_CM)});"
        )
    if diagram.centroid is not None:
        lines.append(
            f"  \\fill[orange] {_cm(diagram, diagram.centroid)} "
            f"circle ({format_value(diagram.centroid_radius / PX_PER_CM)});"
        )

    lines.append("  \\draw[carrier] (A) -- (B) -- (C) -- cycle;")
    lines.append("")
    for label in diagram.side_labels:
        lines.append(f"  \\node[pill] at {_cm(diagram, label.center)} {{{latex_escape(label.text)}}};")
    for label in diagram.vertex_labels:
        lines.append(f"  \\node[ptlabel] at {_cm(diagram, label.position)} {{{latex_escape(label.text)}}};")
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(snapshot: Snapshot, *, problem_text: Optional[str] = None) -> str:
    """Render a standalone LaTeX document for ``snapshot``.

    Raises ``ValueError`` when the snapshot holds no diagram (failed solve).
    """

    if snapshot.diagram is None:
        raise ValueError(f"cannot render failed solve: {snapshot.display.error}")
    header = ""
    if problem_text:
        header = "\\noindent\\textbf{Problem:} " + latex_escape(problem_text.strip()) + "\\par\\vspace{4pt}\n"
    width_cm = format_value(snapshot.diagram.width / PX_PER_CM)
    return standalone_tpl % {
        "width": f"{width_cm}cm",
        "header": header,
        "picture": generate_tikz_code(snapshot.diagram),
    }
