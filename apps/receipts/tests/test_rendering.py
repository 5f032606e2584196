import pytest
from apps.receipts.brands import Brand, BRAND_CONFIGS
from apps.receipts.services import render_receipt


@pytest.mark.django_db
class TestRenderReceipt:
    """Tests for render_receipt."""

    def test_apple_receipt_content(self, make_receipt, fixed_now):
        receipt = make_receipt()
        rendered = render_receipt(receipt, now=fixed_now)

        assert rendered.subject == 'Your Apple Store Receipt - Order #W000000001'
        assert 'W000000001' in rendered.html
        assert '$19.99' in rendered.html
        assert '$59.97' in rendered.html
        assert '$4.95' in rendered.html
        assert '$5.00' in rendered.html
        assert '$69.92' in rendered.html
        assert BRAND_CONFIGS[Brand.APPLE].logo_url in rendered.html

    def test_apple_dates_come_from_render_time(self, make_receipt, fixed_now):
        """Order date is render time; delivery is four days later."""
        rendered = render_receipt(make_receipt(), now=fixed_now)

        assert 'Monday, March 4, 2024' in rendered.html
        assert 'Friday, March 8' in rendered.html
        assert 'Delivery:' in rendered.html

    def test_cartier_has_order_date_but_no_delivery(self, make_receipt, fixed_now):
        receipt = make_receipt(product_name='Cartier Love Bracelet', product_price=690000)
        rendered = render_receipt(receipt, now=fixed_now)

        assert rendered.subject == 'Your Cartier Receipt - Order #W000000001'
        assert 'Acknowledgment of your order' in rendered.html
        assert 'Monday, March 4, 2024' in rendered.html
        assert 'Delivery:' not in rendered.html
        assert 'Friday, March 8' not in rendered.html
        assert BRAND_CONFIGS[Brand.CARTIER].logo_url in rendered.html

    def test_brand_override(self, make_receipt, fixed_now):
        rendered = render_receipt(make_receipt(), brand=Brand.CARTIER, now=fixed_now)
        assert rendered.subject.startswith('Your Cartier Receipt')

    def test_user_fields_are_escaped(self, make_receipt, fixed_now):
        receipt = make_receipt(
            customer_name='<script>alert(1)</script>',
            product_name='Widget <b>bold</b>',
            billing_address='1 Main St" onload="evil()',
        )
        rendered = render_receipt(receipt, now=fixed_now)

        assert '<script>alert(1)</script>' not in rendered.html
        assert '&lt;script&gt;alert(1)&lt;/script&gt;' in rendered.html
        assert '<b>bold</b>' not in rendered.html
        assert '" onload="evil()' not in rendered.html

    def test_text_part_is_not_html_escaped(self, make_receipt, fixed_now):
        receipt = make_receipt(customer_name="O'Brien & Sons")
        rendered = render_receipt(receipt, now=fixed_now)

        assert "O'Brien & Sons" in rendered.text
        assert "O'Brien & Sons" not in rendered.html
        assert 'Total: $69.92' in rendered.text

    def test_missing_image_uses_brand_placeholder(self, make_receipt, fixed_now):
        apple = render_receipt(make_receipt(product_image_url=''), now=fixed_now)
        cartier = render_receipt(
            make_receipt(product_name='Gold Watch', product_image_url=''),
            now=fixed_now,
        )

        assert BRAND_CONFIGS[Brand.APPLE].placeholder_image_url in apple.html
        assert 'text=Cartier' in cartier.html

    def test_product_image_used_when_present(self, make_receipt, fixed_now):
        receipt = make_receipt(product_image_url='https://cdn.example.com/phone.png')
        rendered = render_receipt(receipt, now=fixed_now)

        assert 'https://cdn.example.com/phone.png' in rendered.html
        assert BRAND_CONFIGS[Brand.APPLE].placeholder_image_url not in rendered.html

    def test_same_instant_renders_identically(self, make_receipt, fixed_now):
        receipt = make_receipt()
        first = render_receipt(receipt, now=fixed_now)
        second = render_receipt(receipt, now=fixed_now)

        assert first == second
