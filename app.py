"""
Code Spell Engine - Flask Application
Serves the spell check API used by the editor front end.
"""
from flask import Flask, jsonify

from config_logging import get_config, get_logger, CodeSpellError, VERSION
from code_spell.routes import register_spell_routes

logger = get_logger('app')


def create_app() -> Flask:
    """Build the Flask app with the spell check API mounted."""
    config = get_config()

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = config.max_content_length

    register_spell_routes(app)

    @app.errorhandler(CodeSpellError)
    def handle_code_spell_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.route('/api/health')
    def health():
        """Liveness check"""
        return jsonify({'success': True, 'version': VERSION})

    return app


app = create_app()


if __name__ == '__main__':
    config = get_config()
    is_valid, errors = config.validate()
    if not is_valid:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        raise SystemExit(1)

    logger.info("Starting code spell API", host=config.host, port=config.port)
    app.run(host=config.host, port=config.port, debug=config.debug)
