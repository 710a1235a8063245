# ==============================================================================
# APLICACIÓN FLASK - API JSON del panel de administración
# ==============================================================================
# Las rutas solo reciben eventos de la interfaz (cambios de campo, agregar o
# quitar ítems, confirmar, cancelar, eliminar, buscar) y devuelven el estado
# que la interfaz debe mostrar. Toda la lógica vive en services/.
#
# El formulario abierto de cada navegador se guarda en la sesión Flask,
# igual que un carrito: se reconstruye en cada petición y se vuelve a guardar.
# ==============================================================================

import os

from flask import Flask, jsonify, request, session

from bloomtrade.app_container import get_container
from bloomtrade.performance_logger import init_profiling
from bloomtrade.services import OrderFormSession, ProductFormSession

app = Flask(__name__)

# ═══════════════════════════════════════════════════════════════════════════
# INICIALIZAR SISTEMA DE PROFILING
# ═══════════════════════════════════════════════════════════════════════════
# Mide rendimiento de rutas. Logs en /logs/
# Para desactivar: BLOOMTRADE_PROFILING=0
init_profiling(app)

# ═══════════════════════════════════════════════════════════════════════════════
# MODO PRODUCCIÓN
# ═══════════════════════════════════════════════════════════════════════════════
# True = exige BLOOMTRADE_SECRET_KEY (avisa si falta)
PRODUCTION_MODE = os.environ.get('BLOOMTRADE_PRODUCTION', '0') == '1'

# Datos de demostración en los repositorios (1 = sí)
SEED_DATA = os.environ.get('BLOOMTRADE_SEED_DATA', '1') != '0'

# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURACIÓN DE SESIONES
# ═══════════════════════════════════════════════════════════════════════════════
# SECRET_KEY: En producción DEBE definirse via variable de entorno
# Comando: export BLOOMTRADE_SECRET_KEY="una_clave_larga_y_aleatoria"
_DEFAULT_SECRET = "bloomtrade_dev_secret_key_change_in_production"
_SECRET_KEY = os.environ.get("BLOOMTRADE_SECRET_KEY")

if PRODUCTION_MODE and not _SECRET_KEY:
    print("[ADVERTENCIA] PRODUCTION_MODE activo sin BLOOMTRADE_SECRET_KEY definida")
    print("[ADVERTENCIA] Define la variable de entorno para mayor seguridad")

app.secret_key = _SECRET_KEY or _DEFAULT_SECRET

app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SECURE=False,       # False para HTTP local
    SESSION_COOKIE_SAMESITE='Lax',
    PERMANENT_SESSION_LIFETIME=86400,  # 24 horas
)

# Claves de la sesión Flask para los formularios abiertos
PRODUCT_FORM_KEY = 'product_form'
ORDER_FORM_KEY = 'order_form'


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _container():
    return get_container(seed=SEED_DATA)


def _error(message, status=400):
    return jsonify({'ok': False, 'error': message}), status


def _payload():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _load_product_form():
    data = session.get(PRODUCT_FORM_KEY)
    return ProductFormSession.from_dict(data) if data else None


def _save_product_form(form):
    session[PRODUCT_FORM_KEY] = form.to_dict()
    session.modified = True


def _load_order_form():
    data = session.get(ORDER_FORM_KEY)
    return OrderFormSession.from_dict(data, _container().catalog) if data else None


def _save_order_form(form):
    session[ORDER_FORM_KEY] = form.to_dict()
    session.modified = True


def _form_state(form):
    return {
        'ok': True,
        'mode': 'edit' if form.is_edit else 'create',
        'record_id': form.record_id,
        'draft': form.draft.to_dict(),
    }


# ═══════════════════════════════════════════════════════════════════════════════
# PANEL, CATÁLOGO Y ACTIVIDAD
# ═══════════════════════════════════════════════════════════════════════════════

@app.route('/api/dashboard', methods=['GET'])
def dashboard():
    return jsonify({'ok': True, 'stats': _container().stats_service.compute_dashboard()})


@app.route('/api/catalog', methods=['GET'])
def catalog():
    entries = [entry.to_dict() for entry in _container().catalog.get_all()]
    return jsonify({'ok': True, 'catalog': entries})


@app.route('/api/activity', methods=['GET'])
def activity():
    q = request.args.get('q', '')
    log_type = request.args.get('type') or None
    logs = _container().audit_service.search_logs(q, log_type)
    return jsonify({'ok': True, 'logs': logs})


# ═══════════════════════════════════════════════════════════════════════════════
# PRODUCTOS
# ═══════════════════════════════════════════════════════════════════════════════

@app.route('/api/products', methods=['GET'])
def list_products():
    q = request.args.get('q', '')
    products = _container().product_service.search_products(q)
    return jsonify({'ok': True, 'query': q, 'products': [p.to_dict() for p in products]})


@app.route('/api/products/<pid>', methods=['GET'])
def get_product(pid):
    product = _container().product_service.get_product(pid)
    if product is None:
        return _error('Producto no encontrado', 404)
    return jsonify({'ok': True, 'product': product.to_dict()})


@app.route('/api/products/<pid>', methods=['DELETE'])
def delete_product(pid):
    removed = _container().product_service.delete_product(pid)
    return jsonify({'ok': True, 'deleted': removed is not None, 'id': pid})


@app.route('/api/products/form', methods=['POST'])
def open_product_form():
    record_id = _payload().get('id')
    if record_id is None:
        form = ProductFormSession.for_create()
    else:
        product = _container().product_service.get_product(str(record_id))
        if product is None:
            return _error('Producto no encontrado', 404)
        form = ProductFormSession.for_edit(product)
    _save_product_form(form)
    return jsonify(_form_state(form))


@app.route('/api/products/form', methods=['GET'])
def get_product_form():
    form = _load_product_form()
    if form is None:
        return _error('No hay formulario de producto abierto')
    return jsonify(_form_state(form))


@app.route('/api/products/form', methods=['PATCH'])
def set_product_field():
    form = _load_product_form()
    if form is None:
        return _error('No hay formulario de producto abierto')
    data = _payload()
    try:
        applied = form.set_field(data.get('field', ''), data.get('value'))
    except ValueError:
        return _error(f"Estado inválido: {data.get('value')!r}")
    if not applied:
        return _error(f"Campo no editable: {data.get('field')!r}")
    _save_product_form(form)
    return jsonify(_form_state(form))


@app.route('/api/products/form/submit', methods=['POST'])
def submit_product_form():
    form = _load_product_form()
    if form is None:
        return _error('No hay formulario de producto abierto')
    session.pop(PRODUCT_FORM_KEY, None)
    product = form.submit(_container().product_service)
    if product is None:
        return _error('Producto no encontrado', 404)
    return jsonify({'ok': True, 'product': product.to_dict()})


@app.route('/api/products/form', methods=['DELETE'])
def cancel_product_form():
    session.pop(PRODUCT_FORM_KEY, None)
    return jsonify({'ok': True})


# ═══════════════════════════════════════════════════════════════════════════════
# PEDIDOS
# ═══════════════════════════════════════════════════════════════════════════════

@app.route('/api/orders', methods=['GET'])
def list_orders():
    q = request.args.get('q', '')
    orders = _container().order_service.search_orders(q)
    return jsonify({'ok': True, 'query': q, 'orders': [o.to_dict() for o in orders]})


@app.route('/api/orders/<order_id>', methods=['GET'])
def get_order(order_id):
    order = _container().order_service.get_order(order_id)
    if order is None:
        return _error('Pedido no encontrado', 404)
    return jsonify({'ok': True, 'order': order.to_dict()})


@app.route('/api/orders/<order_id>', methods=['DELETE'])
def delete_order(order_id):
    removed = _container().order_service.delete_order(order_id)
    return jsonify({'ok': True, 'deleted': removed is not None, 'id': order_id})


@app.route('/api/orders/form', methods=['POST'])
def open_order_form():
    container = _container()
    record_id = _payload().get('id')
    if record_id is None:
        form = OrderFormSession.for_create(container.catalog)
    else:
        order = container.order_service.get_order(str(record_id))
        if order is None:
            return _error('Pedido no encontrado', 404)
        form = OrderFormSession.for_edit(order, container.catalog)
    _save_order_form(form)
    return jsonify(_form_state(form))


@app.route('/api/orders/form', methods=['GET'])
def get_order_form():
    form = _load_order_form()
    if form is None:
        return _error('No hay formulario de pedido abierto')
    return jsonify(_form_state(form))


@app.route('/api/orders/form', methods=['PATCH'])
def set_order_field():
    form = _load_order_form()
    if form is None:
        return _error('No hay formulario de pedido abierto')
    data = _payload()
    try:
        applied = form.set_field(data.get('field', ''), data.get('value'))
    except ValueError:
        return _error(f"Estado inválido: {data.get('value')!r}")
    if not applied:
        return _error(f"Campo no editable: {data.get('field')!r}")
    _save_order_form(form)
    return jsonify(_form_state(form))


@app.route('/api/orders/form/items', methods=['POST'])
def add_order_item():
    form = _load_order_form()
    if form is None:
        return _error('No hay formulario de pedido abierto')
    form.add_item()
    _save_order_form(form)
    return jsonify(_form_state(form))


@app.route('/api/orders/form/items/<int:index>', methods=['DELETE'])
def remove_order_item(index):
    form = _load_order_form()
    if form is None:
        return _error('No hay formulario de pedido abierto')
    # Quitar el último ítem es un no-op; se devuelve el estado sin cambios
    form.remove_item(index)
    _save_order_form(form)
    return jsonify(_form_state(form))


@app.route('/api/orders/form/items/<int:index>', methods=['PATCH'])
def update_order_item(index):
    form = _load_order_form()
    if form is None:
        return _error('No hay formulario de pedido abierto')
    data = _payload()
    if not form.update_item(index, data.get('field', ''), data.get('value')):
        return _error('Ítem o campo inválido')
    _save_order_form(form)
    return jsonify(_form_state(form))


@app.route('/api/orders/form/submit', methods=['POST'])
def submit_order_form():
    form = _load_order_form()
    if form is None:
        return _error('No hay formulario de pedido abierto')
    session.pop(ORDER_FORM_KEY, None)
    order = form.submit(_container().order_service)
    if order is None:
        return _error('Pedido no encontrado', 404)
    return jsonify({'ok': True, 'order': order.to_dict()})


@app.route('/api/orders/form', methods=['DELETE'])
def cancel_order_form():
    session.pop(ORDER_FORM_KEY, None)
    return jsonify({'ok': True})
