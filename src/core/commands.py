from __future__ import annotations
"""Découpage d'une ligne de commande `/gcdswap ...`.

Les espaces à l'intérieur de `[...]` ne coupent pas le token: un nom
d'item collé via un lien (ex: `[Aurastone Hammer]`) reste un seul argument.
"""

from dataclasses import dataclass, field

COMMANDS = ("save", "delete", "list", "debug", "sound", "status", "help")


def parse_args(line: str) -> list[str]:
    args: list[str] = []
    current: list[str] = []
    in_brackets = False

    for ch in line:
        if ch == "[":
            in_brackets = True
            current.append(ch)
        elif ch == "]":
            in_brackets = False
            current.append(ch)
        elif ch.isspace() and not in_brackets:
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        args.append("".join(current))
    return args


@dataclass
class Command:
    """Commande reconnue. `name` vaut "arm" pour un nom de preset (ou vide)."""
    name: str
    args: list[str] = field(default_factory=list)

    def arg(self, index: int) -> str | None:
        return self.args[index] if index < len(self.args) else None


def parse_command(line: str) -> Command:
    tokens = parse_args(line)
    head = tokens[0].lower() if tokens else ""
    if head in COMMANDS:
        return Command(name=head, args=tokens[1:])
    # Tout le reste = nom de preset ("" -> mode manuel)
    return Command(name="arm", args=[head])
