#!/usr/bin/env python3
"""Demo of synchronized mention editing.

This example loads a contract, subscribes to mention edits, and simulates a
user typing into one occurrence of a mention. Every edit re-renders the
document, and every occurrence of the edited mention shows the new value,
which is what a UI embedding contractview would redraw.
"""

import sys
from pathlib import Path

from contractview import ContractRenderer, find_all, load_nodes


def print_mentions(output, mention_id):
    """Print the value shown by every input bound to ``mention_id``."""
    inputs = [element for element in find_all(output, tag="input") if element.attrs["data-mention-id"] == mention_id]
    for index, element in enumerate(inputs, start=1):
        print(f"  occurrence {index}: {element.attrs['value']!r}")


def main():
    """Run the demo."""
    default_path = Path(__file__).with_name("service_agreement.json")
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else default_path

    renderer = ContractRenderer()
    output = renderer.render_nodes(load_nodes(path))

    print("=" * 70)
    print("Seeded mention values")
    print("=" * 70)
    for mention_id, value in renderer.store.read().items():
        print(f"  {mention_id} = {value!r}")
    print()

    if not renderer.store.read():
        print("The document has no editable mentions.")
        return

    mention_id = next(iter(renderer.store.read()))
    print(f"Occurrences of {mention_id!r} before editing:")
    print_mentions(output, mention_id)
    print()

    def on_edit(edited_id, value):
        print(f"[EDIT] {edited_id} -> {value!r}")
        print_mentions(renderer.render_nodes(), edited_id)

    unsubscribe = renderer.store.subscribe(on_edit)

    # Simulate typing into the first occurrence, one keystroke at a time
    first_input = next(element for element in find_all(output, tag="input")
                       if element.attrs["data-mention-id"] == mention_id)
    typed = ""
    for char in "Globex":
        typed += char
        first_input.on_change(typed)

    unsubscribe()
    print()
    print("=" * 70)
    print("Final HTML")
    print("=" * 70)
    print(renderer.render_to_string())


if __name__ == "__main__":
    main()
