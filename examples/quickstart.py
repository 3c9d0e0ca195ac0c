"""Quickstart Example - Writing A2L Files with a2lwriter.

Demonstrates the writer end to end:

1. Build a file from scratch (synthesized layout)
2. Keep the layout of elements loaded from an existing file
3. Collapse included elements into /include directives
4. Format numbers and strings for A2L
5. Configure indentation

Python 3.13+.
"""

from __future__ import annotations

from a2lwriter import FORCE_BREAK, Node, WriterConfig, escape_string, render
from a2lwriter.writer import format_double, format_u32


def _version(position: int = 0) -> Node:
    version = Node(position=position)
    version.add_fixed_item("1", position)
    version.add_fixed_item("71", position)
    return version


def example_1_new_file() -> None:
    """Build a small file where every element is created at runtime."""
    print("=" * 60)
    print("Example 1: New File")
    print("=" * 60)

    root = Node()
    top = root.add_tagged_group()
    top.add_tagged_item("ASAP2_VERSION", _version())

    project = Node()
    project.add_fixed_item("demo", 0)
    project.add_fixed_item(f'"{escape_string("Demo project")}"', 0)
    modules = project.add_tagged_group()

    module = Node()
    module.add_fixed_item("ECU", 0)
    module.add_fixed_item('""', 0)
    elements = module.add_tagged_group()

    measurement = Node()
    for text in ("engine_speed", '"Engine speed"', "UWORD", "NO_COMPU_METHOD", "0", "0"):
        measurement.add_fixed_item(text, 0)
    measurement.add_fixed_item(format_double(0.0), 0)
    measurement.add_fixed_item(format_double(8000.0), 0)
    address = measurement.add_tagged_group()
    ecu_address = Node(position=FORCE_BREAK)
    ecu_address.add_fixed_item(format_u32(0x20001000, True), FORCE_BREAK)
    address.add_tagged_item("ECU_ADDRESS", ecu_address)

    elements.add_tagged_item("MEASUREMENT", measurement, is_block=True)
    modules.add_tagged_item("MODULE", module, is_block=True)
    # Added last, still written after ASAP2_VERSION
    top.add_tagged_item("PROJECT", project, is_block=True)

    print(root.finish())
    print()


def example_2_loaded_layout() -> None:
    """Elements remembering their source lines keep their spacing."""
    print("=" * 60)
    print("Example 2: Loaded Layout")
    print("=" * 60)

    root = Node(position=1)
    top = root.add_tagged_group()
    top.add_tagged_item("ASAP2_VERSION", _version(1))

    project = Node(position=3)
    project.add_fixed_item("loaded", 3)
    project.add_fixed_item('""', 3)
    top.add_tagged_item("PROJECT", project, is_block=True)

    print(root.finish())
    print()


def example_3_includes() -> None:
    """Elements from include files become one directive per file."""
    print("=" * 60)
    print("Example 3: Includes")
    print("=" * 60)

    root = Node(position=1)
    group = root.add_tagged_group()
    for line, tag in enumerate(("MEASUREMENT", "MEASUREMENT", "CHARACTERISTIC"), start=2):
        group.add_tagged_item(tag, Node("signals.a2l", line), is_block=True)
    group.add_tagged_item("COMPU_METHOD", Node("conversions.a2l", 9), is_block=True)

    print(root.finish())
    print()


def example_4_indentation() -> None:
    """WriterConfig changes the indentation width."""
    print("=" * 60)
    print("Example 4: Indentation")
    print("=" * 60)

    root = Node()
    top = root.add_tagged_group()
    top.add_tagged_item("ASAP2_VERSION", _version())
    project = Node()
    project.add_fixed_item("wide", 0)
    top.add_tagged_item("PROJECT", project, is_block=True)

    print(render(root, WriterConfig(indent_width=4)))
    print()


def main() -> None:
    """Run all examples."""
    print()
    print("a2lwriter Quickstart")
    print()

    example_1_new_file()
    example_2_loaded_layout()
    example_3_includes()
    example_4_indentation()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
