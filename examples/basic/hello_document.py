"""Build and render a LaTeX document in a few lines — zero config, zero deps."""

from texbox import Command, Document, Literal, render

doc = Document.new()
doc.preamble.set_title(Command("LaTeX")).set_author("Maxim Zhiburt")
doc = doc.with_(Literal("something"))
print(render(doc), end="")
