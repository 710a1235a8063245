# ==============================================================================
# DATOS DE DEMOSTRACIÓN
# ==============================================================================
# Registros iniciales de los repositorios cuando BLOOMTRADE_SEED_DATA=1.
# Están en orden de listado (más reciente primero).
# ==============================================================================

SEED_PRODUCTS = [
    {
        'id': '1',
        'name': 'Premium Widget',
        'description': 'High-quality widget with advanced features',
        'price': 299.99,
        'stock': 45,
        'category': 'Electronics',
        'status': 'active',
        'created_at': '2024-01-15',
    },
    {
        'id': '2',
        'name': 'Standard Tool',
        'description': 'Reliable tool for everyday use',
        'price': 149.99,
        'stock': 23,
        'category': 'Tools',
        'status': 'active',
        'created_at': '2024-01-12',
    },
    {
        'id': '3',
        'name': 'Basic Package',
        'description': 'Essential package for beginners',
        'price': 79.99,
        'stock': 0,
        'category': 'Starter',
        'status': 'inactive',
        'created_at': '2024-01-10',
    },
]

SEED_ORDERS = [
    {
        'id': '1001',
        'customer_name': 'John Doe',
        'customer_email': 'john@example.com',
        'items': [
            {'product_id': '1', 'product_name': 'Premium Widget', 'quantity': 2, 'unit_price': 299.99},
            {'product_id': '2', 'product_name': 'Standard Tool', 'quantity': 1, 'unit_price': 149.99},
        ],
        'status': 'processing',
        'created_at': '2024-01-16',
        'shipping_address': '123 Main St, City, State 12345',
    },
    {
        'id': '1002',
        'customer_name': 'Jane Smith',
        'customer_email': 'jane@example.com',
        'items': [
            {'product_id': '3', 'product_name': 'Basic Package', 'quantity': 3, 'unit_price': 79.99},
        ],
        'status': 'shipped',
        'created_at': '2024-01-15',
        'shipping_address': '456 Oak Ave, Town, State 54321',
    },
    {
        'id': '1003',
        'customer_name': 'Bob Johnson',
        'customer_email': 'bob@example.com',
        'items': [
            {'product_id': '1', 'product_name': 'Premium Widget', 'quantity': 1, 'unit_price': 299.99},
        ],
        'status': 'delivered',
        'created_at': '2024-01-14',
        'shipping_address': '789 Pine Rd, Village, State 98765',
    },
]

# Tabla fija del selector de productos en los ítems de pedido
CATALOG_ENTRIES = [
    {'id': '1', 'name': 'Premium Widget', 'price': 299.99},
    {'id': '2', 'name': 'Standard Tool', 'price': 149.99},
    {'id': '3', 'name': 'Basic Package', 'price': 79.99},
]
