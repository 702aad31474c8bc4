"""Compile once, render many: values are escaped, markup is not."""

from qtpl import Template

hello = Template("<p>Hello, <strong>{name}</strong>!</p>", params=("name",))

print(hello.render_string("world"))
print(hello.render_string("<script>"))
