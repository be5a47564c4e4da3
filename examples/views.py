"""Leaves and composites driven through the same perform() call."""
from treelette import PrintLeaf, Composite, DecoratingComposite

hello = PrintLeaf("hello")
world = PrintLeaf("world")
js = PrintLeaf("js")

hello_view = Composite(name="helloView")
hello_view.add(hello)
hello_view.add(world)

js_view = Composite(name="jsView")
js_view.add(world)
js_view.add(js)

nested_view = DecoratingComposite(hello_view, js_view, name="nestedView")

hello.perform()
hello_view.perform()
js_view.perform()
nested_view.perform()

for child in nested_view:
    child.perform()
