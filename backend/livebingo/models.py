from livebingo import db, bcrypt
from flask_login import UserMixin


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(100), nullable=False)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }


class Phrase(db.Model):
    __tablename__ = 'phrase'
    id = db.Column(db.Integer, primary_key=True)
    value = db.Column(db.String(50), nullable=False)


class Cell(db.Model):
    """One square of a user's board.

    Cells are created only by provisioning and mutated only by toggling,
    which flips ``checked`` and never touches ``phrase`` or ``position``.
    """
    __tablename__ = 'cell'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'position', name='uq_cell_user_position'),
        # Cell ids are never reused, so a stale id cannot hit a reprovisioned board
        {'sqlite_autoincrement': True},
    )
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    phrase = db.Column(db.String(50), nullable=False)
    checked = db.Column(db.Boolean, default=False, nullable=False)
    # Nullable only for rows written before positions existed
    position = db.Column(db.Integer, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'value': self.phrase,
            'checked': bool(self.checked),
            'position': self.position,
        }
