"""treelette: tiny composite trees with a uniform ``perform()``.

Main components:
* `PrintLeaf`: terminal node emitting one line of text
* `Composite`: ordered container delegating to its children
* `DecoratingComposite`: Composite wrapped in start/end marker lines
* `Product` / `Collection`: priced items whose totals aggregate recursively
"""

# Version info
__version__ = "0.1.0"

# Core components
from treelette.core.node import Node
from treelette.core.leaf import Leaf, PrintLeaf
from treelette.core.composite import Composite
from treelette.core.decorating import DecoratingComposite
from treelette.core.priced import PricedItem, Product, Collection, ItemSnapshot

from treelette.errors import UnsupportedOperation, TreeDefinitionError
from treelette.io.output import emit, record

__all__ = [
    # Core classes
    "Node",
    "Leaf",
    "PrintLeaf",
    "Composite",
    "DecoratingComposite",
    "PricedItem",
    "Product",
    "Collection",
    "ItemSnapshot",

    # Errors
    "UnsupportedOperation",
    "TreeDefinitionError",

    # Output
    "emit",
    "record",
]
