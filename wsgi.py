# ==============================================================================
# WSGI Entry Point - Para Gunicorn u otro servidor WSGI
# ==============================================================================
# Este archivo es el punto de entrada para servidores WSGI.
#
# USO:
#   gunicorn wsgi:app --bind 0.0.0.0:$PORT
#
# ESTRUCTURA DEL PROYECTO:
#   repo_root/           <- Directorio de trabajo (en sys.path automáticamente)
#   ├── wsgi.py          <- Este archivo
#   ├── pyproject.toml
#   └── bloomtrade/      <- Paquete Python
#       ├── main.py
#       ├── models/
#       ├── repositories/
#       └── services/
#
# Los datos viven en memoria del proceso: usar un solo worker, o cada
# worker tendrá su propia copia de productos y pedidos.
# ==============================================================================

from bloomtrade.main import app

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
