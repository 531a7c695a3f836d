"""Interactive console for inspecting and pruning the product database."""

import logging
from typing import List, Tuple

from dotenv import load_dotenv

from src.config import get_config
from src.services import CatalogError, ProductQueryService, ProductStore

load_dotenv()

VIEW_LIMIT = 10

HELP_TEXT = """Available commands:
1. view - View products (first 10)
2. count - Count products
3. search <term> - Search products
4. delete <id> - Delete product by ID
5. quit - Exit"""


def handle_command(store: ProductStore, line: str) -> Tuple[List[str], bool]:
    """Run one console command.

    Returns:
        The output lines and whether the console should keep running.
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command == "view":
        products = store.get_all()[:VIEW_LIMIT]
        return ["Products:"] + [f"ID: {p.id} | {p.name} | ${p.price:.2f}" for p in products], True

    if command == "count":
        return [f"Total products: {store.count_all()}"], True

    if command == "search":
        if not argument:
            return ["Please provide search term"], True
        products = ProductQueryService(store).search(argument)
        return [f'Search results for "{argument}":'] + [
            f"ID: {p.id} | {p.name} | {p.brand}" for p in products
        ], True

    if command == "delete":
        if not argument:
            return ["Please provide product ID"], True
        try:
            product_id = int(argument)
        except ValueError:
            return [f"Invalid product ID: {argument}"], True
        if store.delete_by_id(product_id):
            return [f"Deleted product with ID: {product_id}"], True
        return [f"No product with ID: {product_id}"], True

    if command == "quit":
        return ["Goodbye!"], False

    return ["Unknown command. Try: view, count, search <term>, delete <id>, quit"], True


def main() -> None:
    config = get_config()
    logging.basicConfig(level=config.logging.level)

    print("Product Database Manager")
    print(HELP_TEXT)

    with ProductStore(config.database.path) as store:
        running = True
        while running:
            try:
                line = input("\nEnter command: ")
            except EOFError:
                break
            try:
                output, running = handle_command(store, line)
            except CatalogError as e:
                output = [f"Error: {e}"]
            print("\n".join(output))


if __name__ == "__main__":
    main()
