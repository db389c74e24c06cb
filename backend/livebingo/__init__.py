from flask import Flask, jsonify, redirect, request, url_for
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def wants_json():
    """True when the caller is a programmatic client rather than a browser."""
    if request.is_json:
        return True
    return request.accept_mimetypes.best == 'application/json'


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('ALLOWED_ORIGINS') or []

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from livebingo.main import main
    flask_app.register_blueprint(main)

    from livebingo.api.boards import boards
    flask_app.register_blueprint(boards, url_prefix='/api/boards')

    from livebingo.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from livebingo.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        if wants_json():
            return jsonify({'success': False, 'error': 'Authentication required'}), 401
        return redirect(url_for('main.index'))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from livebingo.phrases import seed_phrases
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            seeded = seed_phrases()
            print(f'Database has been reset and seeded with {seeded} phrases!')

    @click.command('clear-boards')
    def clear_boards_command():
        """Discards every board and reseeds the phrase pool."""
        from livebingo.services.boards.maintenance import clear_all_boards
        with flask_app.app_context():
            removed = clear_all_boards()
            print(f'Cleared {removed} cells; boards are reprovisioned on next login.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(clear_boards_command)

    return flask_app
