"""
Generate a framework-structured prompt (TCREI / CLEAR) from a task description.

Requires: API_KEY (Gemini), OPENAI_API_KEY or CHAT_API_BASE_URL in .env.
Run from apps/api:
  python scripts/generate_prompt.py "Erstelle eine Marketing-E-Mail"
  echo "Erstelle eine Marketing-E-Mail" | python scripts/generate_prompt.py --copy-to prompt.txt
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)

from promptlab.core import get_settings
from promptlab.providers import ChatConfigError, get_chat_provider
from promptlab.services import LineKind, PromptComposer, PromptSession, SessionState


class FileClipboard:
    """Stands in for the system clipboard: the copied text lands in a file."""

    def __init__(self, path: Path):
        self.path = path

    def write(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")


def print_result(session: PromptSession) -> None:
    if session.justification:
        print("Framework-Wahl")
        print(f"  {session.justification}")
        print()
    for line in session.formatted_lines():
        if line.kind is LineKind.SECTIONED:
            print(line.header.rstrip())
            print(f"  {line.content}")
        else:
            print(line.text)


async def run(task_description: str, strict: bool, copy_to: Path | None) -> int:
    s = get_settings()
    composer = PromptComposer(get_chat_provider(s))
    session = PromptSession(composer, strict_headers=strict or s.strict_section_headers)

    if not await session.submit(task_description):
        logger.error("Task description is empty; nothing to generate.")
        return 2
    if session.state is SessionState.FAILED:
        print(session.error, file=sys.stderr)
        return 1

    print_result(session)
    if copy_to is not None and session.copy(FileClipboard(copy_to)):
        logger.info("Kopiert! Full prompt written to %s", copy_to)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Turn a task or goal into a precise prompt using the TCREI or CLEAR framework."
    )
    parser.add_argument("task", nargs="?", help="Task description (read from stdin when omitted)")
    parser.add_argument("--strict", action="store_true",
                        help="Only treat single known framework letters (T, C, R, E, I, L, A) as section headers")
    parser.add_argument("--copy-to", type=Path, default=None,
                        help="Write the full generated prompt (including justification) to this file")
    parser.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    task = args.task if args.task is not None else sys.stdin.read()
    try:
        code = asyncio.run(run(task, args.strict, args.copy_to))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        sys.exit(0)
    except ChatConfigError as e:
        logger.error("%s", e)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
