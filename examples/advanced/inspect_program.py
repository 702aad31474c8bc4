"""Look inside a compiled template: a flat list of write instructions."""

from qtpl import compile_template

program = compile_template(
    """
    <div class={!q cls}>
        Hello, {name}!
        {!b raw}
    </div>
    """
)

for instruction in program:
    print(instruction)
