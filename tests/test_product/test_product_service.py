from product.service import ProductService


def test_greeting():
    greeting = ProductService().get_greeting()

    assert "Product Module" in greeting
    assert "📦" in greeting
