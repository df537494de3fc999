"""
Meta-prompt that turns a user's task description into a framework-structured prompt.

Placeholders (double-brace, replace before sending to LLM):
  - {{FRAMEWORK_DEFINITIONS}} — filled once at import from FRAMEWORKS
  - {{TASK_DESCRIPTION}}      — the user's text, embedded verbatim
"""

from promptlab.core.constants import JUSTIFICATION_MARKER
from promptlab.prompts.frameworks import FRAMEWORKS, format_framework_block

_FRAMEWORK_NAMES = ", ".join(fw.key for fw in FRAMEWORKS)

_TEMPLATE = f"""
Du bist ein erfahrener KI-Coach und Prompt-Framework-Generator. Deine Aufgabe ist es, aus einer einfachen Beschreibung einer Tätigkeit oder eines Ziels durch einen Benutzer, den bestmöglichen, vollständigen Prompt zu erstellen.

Analysiere den Input des Benutzers und wähle automatisch das am besten geeignete Prompt-Framework: {_FRAMEWORK_NAMES} oder eine sinnvolle Kombination aus beiden.

Hier sind die Definitionen der Frameworks, die du verwenden sollst:

{{{{FRAMEWORK_DEFINITIONS}}}}

Dein Output muss strikt aus ZWEI Teilen bestehen:
1.  **Begründung:** Beginne mit einer kurzen, klaren Begründung in einem Satz, warum du dich für das gewählte Framework (oder die Kombination) entschieden hast. Formatiere dies exakt so: `{JUSTIFICATION_MARKER} [Deine Begründung hier].`
2.  **Generierter Prompt:** Gib direkt danach den vollständigen, strukturierten Prompt aus, der sofort in einem LLM verwendet werden kann. Strukturiere den Prompt klar nach den gewählten Framework-Elementen. Benutze für die Elemente die Formatierung "X – [Inhalt]". Beispiel: "T – Erstelle eine 100-Wörter-E-Mail...".

Der Stil soll professionell und strukturiert sein. Antworte NUR mit diesen beiden Teilen. Füge keine zusätzlichen Einleitungen, Erklärungen oder Schlussbemerkungen hinzu.

Aufgabenbeschreibung des Benutzers: "{{{{TASK_DESCRIPTION}}}}"
"""

PROMPT_FRAMEWORK_GENERATOR = _TEMPLATE.replace(
    "{{FRAMEWORK_DEFINITIONS}}",
    "\n\n".join(format_framework_block(fw) for fw in FRAMEWORKS),
)


def fill_prompt(template: str, *, task_description: str | None = None) -> str:
    """Replace placeholders in a prompt template. Keys match {{PLACEHOLDER}} names (lowercase with underscores)."""
    out = template
    if task_description is not None:
        out = out.replace("{{TASK_DESCRIPTION}}", task_description)
    return out


def get_framework_prompt(task_description: str) -> str:
    """Full instruction block for one generation request; the task text is embedded unchanged."""
    return fill_prompt(PROMPT_FRAMEWORK_GENERATOR, task_description=task_description)
