"""Prompt-engineering frameworks the generator chooses between.

Each element is written as "<LETTER> – <Name>: <Beschreibung>" in the meta-prompt,
and the model is asked to use the same "<LETTER> – " prefix for its section lines.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FrameworkElement:
    letter: str
    name: str
    description: str


@dataclass(frozen=True)
class Framework:
    key: str
    use_case: str
    elements: tuple[FrameworkElement, ...]

    @property
    def letters(self) -> str:
        return "".join(e.letter for e in self.elements)


TCREI = Framework(
    key="TCREI",
    use_case="Ideal für komplexe, mehrstufige Aufgaben",
    elements=(
        FrameworkElement("T", "Task", "Definiere die Aufgabe klar und spezifisch."),
        FrameworkElement("C", "Context", "Beschreibe den Rahmen (Branche, Zielgruppe, Stil, Ton)."),
        FrameworkElement("R", "References", "Gib Beispiele, Muster oder Referenztexte."),
        FrameworkElement("E", "Evaluate", "Lege Kriterien zur Bewertung des Ergebnisses fest."),
        FrameworkElement("I", "Iterate", "Fordere zur schrittweisen Verbesserung auf."),
    ),
)

CLEAR = Framework(
    key="CLEAR",
    use_case="Ideal für schnelle, präzise und verständliche Prompts",
    elements=(
        FrameworkElement("C", "Context", "Beschreibe den Arbeitsrahmen, das Ziel, den Hintergrund."),
        FrameworkElement("L", "Length", "Gib die gewünschte Länge der Antwort an."),
        FrameworkElement("E", "Examples", "Stelle Vorlagen oder Muster bereit."),
        FrameworkElement("A", "Audience", "Definiere die Zielgruppe der Antwort."),
        FrameworkElement("R", "Role", "Weise der KI eine spezifische Expertenrolle zu."),
    ),
)

FRAMEWORKS: tuple[Framework, ...] = (TCREI, CLEAR)

# T, C, R, E, I, L, A
KNOWN_ELEMENT_LETTERS: frozenset[str] = frozenset(
    e.letter for fw in FRAMEWORKS for e in fw.elements
)


def format_framework_block(framework: Framework) -> str:
    lines = [f"**{framework.key} Framework ({framework.use_case}):**"]
    lines.extend(f"- {e.letter} – {e.name}: {e.description}" for e in framework.elements)
    return "\n".join(lines)
