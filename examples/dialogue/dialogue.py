# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dialogue - Example dialogue tree for a restaurant booking bot.

A didactic example showing how to build a TreeGraph once, walk it along
the answers given by a user, and prune a branch that is no longer offered.
"""

from __future__ import annotations

from treegraph import StructuralViolation, TreeGraph, TreeGraphNode


class Dialogue:
    """A dialogue where every node is a bot line and keys are answers.

    Example:
        >>> dialogue = Dialogue()
        >>> dialogue.say('Start', 'Hello! Do you want to eat or book a seat?')
        >>> dialogue.say('Essen', 'What do you want? Pizza or pasta?', after='Start')
        >>> dialogue.reply(['Essen'])
        'What do you want? Pizza or pasta?'
    """

    def __init__(self) -> None:
        self._graph = TreeGraph()

    @property
    def graph(self) -> TreeGraph:
        """Access the underlying TreeGraph."""
        return self._graph

    def say(self, key: str, line: str, after: str | None = None) -> None:
        """Add a bot line reached by answering key after the line at after."""
        self._graph.append_node(TreeGraphNode(line, key, after))

    def reply(self, answers: list[str]) -> str | None:
        """Return the bot line reached by the given answers."""
        node = self._graph.travel_to_node(answers)
        return node.data if node is not None else None

    def drop(self, key: str) -> None:
        """Stop offering the answer key and everything after it."""
        self._graph.remove_node_with_children(key)

    def print_tree(self) -> None:
        """Print the dialogue structure for debugging."""
        print("=" * 60)
        print("DIALOGUE")
        print("=" * 60)
        for route, node in self._graph.walk():
            indent = "  " * len(route)
            print(f"{indent}[{node.key}] {node.data}")


def build_restaurant() -> Dialogue:
    dialogue = Dialogue()
    dialogue.say('Start', 'Hallo, willst du etwas Essen gehen, oder einen Sitzplatz buchen?')
    dialogue.say('Essen', 'Ok, was willst du essen? Pizza oder Pasta?', after='Start')
    dialogue.say('Sitzplatz', 'Ok, willst du am Fenster oder am Gang sitzen?', after='Start')
    dialogue.say('Gang', 'Ok, dann einen Sitzplatz am Gang. Bis dann!', after='Sitzplatz')
    return dialogue


if __name__ == '__main__':
    dialogue = build_restaurant()
    dialogue.print_tree()
    print(dialogue.reply(['Sitzplatz', 'Gang']))

    try:
        dialogue.say('Fenster', 'Ok, am Fenster.', after='Tisch')
    except StructuralViolation as e:
        print(f"Rejected: {e}")

    dialogue.drop('Sitzplatz')
    dialogue.print_tree()
    print(dialogue.reply(['Sitzplatz']))
