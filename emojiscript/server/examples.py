"""Example programs shown by the playground, in both syntaxes."""

from __future__ import annotations

from typing import List

from emojiscript.service.models import ExampleProgram

MARKUP_EXAMPLES: List[ExampleProgram] = [
    ExampleProgram(
        title="Hello World",
        description="Basic console output",
        code='<print>"Hello, World!"</print>',
        syntax="markup",
        category="basics",
    ),
    ExampleProgram(
        title="Variables",
        description="Declare variables and constants",
        code=(
            "<const name=\"user\" value=\"'Alice'\"/>\n"
            '<let name="age" value="25"/>\n'
            '<let name="active" value="true"/>'
        ),
        syntax="markup",
        category="basics",
    ),
    ExampleProgram(
        title="Function",
        description="Function with parameters",
        code=(
            '<function name="greet" params="name">\n'
            '  <return>"Hello, " + name</return>\n'
            "</function>\n"
            '<print>greet("World")</print>'
        ),
        syntax="markup",
        category="functions",
    ),
    ExampleProgram(
        title="Arrow Function",
        description="Arrow function syntax",
        code='<const name="add" value="(a, b) => a + b"/>\n<print>add(5, 3)</print>',
        syntax="markup",
        category="functions",
    ),
    ExampleProgram(
        title="If/Else",
        description="Conditional logic",
        code=(
            '<let name="age" value="20"/>\n'
            '<if condition="age >= 18">\n'
            '  <print>"Adult"</print>\n'
            "</if>\n"
            "<else>\n"
            '  <print>"Minor"</print>\n'
            "</else>"
        ),
        syntax="markup",
        category="control",
    ),
    ExampleProgram(
        title="For Loop",
        description="Loop from 0 to 5",
        code='<loop var="i" from="0" to="5">\n  <print>i</print>\n</loop>',
        syntax="markup",
        category="loops",
    ),
    ExampleProgram(
        title="ForEach Loop",
        description="Iterate over array",
        code=(
            "<const name=\"items\" value=\"['apple', 'banana', 'orange']\"/>\n"
            '<loop var="item" in="items">\n'
            "  <print>item</print>\n"
            "</loop>"
        ),
        syntax="markup",
        category="loops",
    ),
    ExampleProgram(
        title="While Loop",
        description="Loop while condition is true",
        code=(
            '<let name="count" value="0"/>\n'
            '<while condition="count < 3">\n'
            "  <print>count</print>\n"
            "  count++\n"
            "</while>"
        ),
        syntax="markup",
        category="loops",
    ),
    ExampleProgram(
        title="Class",
        description="Create a class with methods",
        code=(
            '<class name="Person">\n'
            '  <method name="init" params="name">\n'
            "    this.name = name\n"
            "  </method>\n"
            '  <method name="greet">\n'
            '    <return>"Hi, " + this.name</return>\n'
            "  </method>\n"
            "</class>"
        ),
        syntax="markup",
        category="classes",
    ),
    ExampleProgram(
        title="Try/Catch",
        description="Handle a thrown error",
        code=(
            "<try>\n"
            '  <throw>new Error("boom")</throw>\n'
            "</try>\n"
            '<catch error="err">\n'
            "  <print>err.message</print>\n"
            "</catch>"
        ),
        syntax="markup",
        category="errors",
    ),
    ExampleProgram(
        title="Async Function",
        description="Async/await pattern",
        code=(
            '<function name="fetchData" params="url" async="true">\n'
            '  <const name="response" value="await fetch(url)"/>\n'
            "  <return>await response.json()</return>\n"
            "</function>"
        ),
        syntax="markup",
        category="async",
    ),
]

EMOJI_EXAMPLES: List[ExampleProgram] = [
    ExampleProgram(
        title="Hello World",
        description="Print to console",
        code='📝("Hello, World!")',
        syntax="emoji",
        category="basics",
    ),
    ExampleProgram(
        title="Variables",
        description="Declare variables",
        code='📦 name 🟰 "EmojiScript"\n🔢 age 🟰 25\n🔢 active 🟰 ✅',
        syntax="emoji",
        category="basics",
    ),
    ExampleProgram(
        title="Function",
        description="Function with return",
        code='🎯 greet(name) {\n  🔙 "Hello, " ➕ name\n}\n📝(greet("World"))',
        syntax="emoji",
        category="functions",
    ),
    ExampleProgram(
        title="Arrow Function",
        description="Arrow function",
        code="📦 add 🟰 (a, b) ➡️ a ➕ b\n📝(add(5, 3))",
        syntax="emoji",
        category="functions",
    ),
    ExampleProgram(
        title="If/Else",
        description="Conditional statement",
        code='📦 age 🟰 20\n❓ (age 📈 18) {\n  📝("Adult")\n} ❌ {\n  📝("Minor")\n}',
        syntax="emoji",
        category="control",
    ),
    ExampleProgram(
        title="While Loop",
        description="Loop with condition",
        code="🔢 count 🟰 0\n🔄 (count ⬇️ 3) {\n  📝(count)\n  count➕➕\n}",
        syntax="emoji",
        category="loops",
    ),
    ExampleProgram(
        title="Class",
        description="Create a class",
        code=(
            "🔐 Person {\n"
            "  🔧(name) {\n"
            "    🎭.name = name\n"
            "  }\n"
            "  greet() {\n"
            '    🔙 "Hi, " ➕ 🎭.name\n'
            "  }\n"
            "}\n"
            '📦 p = 🎁 Person("Alice")\n'
            "📝(p.greet())"
        ),
        syntax="emoji",
        category="classes",
    ),
    ExampleProgram(
        title="Async Function",
        description="Async operation",
        code="⚡ 🎯 fetchData(url) {\n  📦 response = ⏳ fetch(url)\n  🔙 ⏳ response.json()\n}",
        syntax="emoji",
        category="async",
    ),
]


def examples_for(syntax: str) -> List[ExampleProgram]:
    """Examples for ``markup``; anything else gets the emoji examples."""
    return MARKUP_EXAMPLES if syntax == "markup" else EMOJI_EXAMPLES


__all__ = ["MARKUP_EXAMPLES", "EMOJI_EXAMPLES", "examples_for"]
