"""
Receipts App - Branded Receipt Generation and Delivery

Users describe a purchase (customer, product, price, tax, shipping); the app
computes an exact money breakdown, stores a Receipt, renders a brand-styled
HTML email and sends it to the customer, spending one credit per confirmed
delivery.

Key Features:
- Integer minor-unit money arithmetic with round-half-up at the cent boundary
- Brand selection (Apple-style or Cartier-style) from product heuristics
- One template-driven renderer parameterised by brand configuration
- SMTP delivery with an explicit timeout, failures reported as a flag
- Credit deduction and email status committed in one transaction

Architecture:
- Models: Receipt
- Brands: Brand, BrandConfig, select_brand
- Services: money, order_numbers, rendering, delivery, receipt_creation
- Views: ReceiptViewSet (list/create for the calling user)
"""
