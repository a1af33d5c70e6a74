from flask import Flask
import logging

from .config import get_config
from .errors import register_error_handlers
from models.db_storage import DBStorage


def create_app(config=None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
      - config may be a config name ("dev", "test", "prod"), a config
        class/object, or None to pick by APP_ENV
      - the DBStorage is built here, kept in app.extensions["storage"] and
        handed to stores/services; nothing imports it as a global
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    if config is None or isinstance(config, str):
        config = get_config(config)
    app.config.from_object(config)

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(app.config.get("LOG_LEVEL", "INFO"))

    storage = DBStorage(app.config["DATABASE_URL"], echo=app.config.get("SQL_ECHO", False))
    storage.reload()
    app.extensions["storage"] = storage

    # Register global error handlers that return the {"erro": ...} envelope
    register_error_handlers(app)

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .transactions import bp as tx_bp
    from .cli import register_commands

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(tx_bp, url_prefix="/api")
    register_commands(app)

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        # This calls scoped_session.remove(), preventing connection leaks
        storage.close()

    @app.route("/")
    def root():
        return {
            "mensagem": "API Finance - Gerenciador de Transações",
            "endpoints": {
                "POST /api/criar-conta": "Criar nova conta (login, senha)",
                "POST /api/login": "Fazer login (login, senha)",
                "POST /api/refresh-token": "Renovar token de acesso (refreshToken)",
                "GET /api/transacoes": "Listar transações com paginação (requer autenticação) - Query params: pagina, limite",
                "POST /api/transacoes": "Criar transação (requer autenticação)",
                "DELETE /api/transacoes/:id": "Deletar transação (requer autenticação)",
                "GET /api/health": "Verificar saúde da API",
            },
        }, 200

    return app
