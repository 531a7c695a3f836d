"""Tests for the interactive database console commands."""

from manage_db import handle_command


class TestHandleCommand:
    """Test each console command against a temporary store."""

    def test_count(self, store, make_product):
        store.insert(make_product())
        store.insert(make_product())

        output, running = handle_command(store, "count")

        assert output == ["Total products: 2"]
        assert running is True

    def test_view_limits_to_ten(self, store, make_product):
        for i in range(12):
            store.insert(make_product(name=f"Item {i:02d}", price=5))

        output, _ = handle_command(store, "view")

        assert output[0] == "Products:"
        assert len(output) == 11
        assert output[1].endswith("| Item 00 | $5.00")

    def test_search(self, store, make_product):
        product_id = store.insert(make_product(name="Sony Headphones", brand="Sony"))
        store.insert(make_product(name="Desk"))

        output, _ = handle_command(store, "search sony")

        assert output == ['Search results for "sony":', f"ID: {product_id} | Sony Headphones | Sony"]

    def test_search_requires_term(self, store):
        assert handle_command(store, "search") == (["Please provide search term"], True)

    def test_delete(self, store, make_product):
        product_id = store.insert(make_product())

        output, _ = handle_command(store, f"delete {product_id}")

        assert output == [f"Deleted product with ID: {product_id}"]
        assert store.count_all() == 0

    def test_delete_rejects_bad_input(self, store):
        assert handle_command(store, "delete") == (["Please provide product ID"], True)
        assert handle_command(store, "delete abc") == (["Invalid product ID: abc"], True)
        assert handle_command(store, "delete 99") == (["No product with ID: 99"], True)

    def test_quit_and_unknown(self, store):
        assert handle_command(store, "QUIT") == (["Goodbye!"], False)
        output, running = handle_command(store, "frobnicate")
        assert output[0].startswith("Unknown command")
        assert running is True
