"""Prices aggregating through nested collections."""
from treelette import Product, Collection
from treelette.utils.logging import show_tree
from treelette.utils.tree import total_line

electronics = Collection(
    "Electronics",
    Product("Laptop", 1500),
    Product("Mouse", 25),
    Product("Keyboard", 100),
    Product("HDMI cable", 10),
)
textile = Collection("Textile", Product("Bag", 50), Product("Mouse pad", 5))
purchase = Collection("Purchase", electronics, textile)

show_tree(purchase)
print(total_line(purchase.price))
