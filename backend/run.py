from livebingo import create_app, db, socketio
from livebingo.phrases import seed_phrases

app = create_app()

if __name__ == '__main__':
    with app.app_context():
        db.create_all()
        seed_phrases()
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host='0.0.0.0', port=3000, debug=True)
