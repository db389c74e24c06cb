from livebingo import db
from livebingo.models import Phrase

DEFAULT_PHRASES = (
    'Face mask called', 'Missed fieldgoal', 'Eagles fumble', 'Chiefs fumble',
    'Eagles throw interception', 'Chiefs throw interception', 'Safety',
    'Eagles lead at halftime', 'Chiefs lead at halftime', '2pt conversion',
    'Interception to a touchdown', 'fumble to a touchdown',
    'Eagles lead at end of 1st qtr', 'Chiefs lead at end of 1st qtr',
    'Eagles lead at end of 3rd qtr', 'Chiefs lead at end of 3rd quarter',
    'Game tied at end of 4th qtr', 'Eagles win the game', 'Chiefs win the game',
    'Coaches challenge', 'Punt return for TD', 'Kickoff return for TD',
    'Successful 4th down conversion', 'Eagles quarterback sacked',
    'Chiefs quarterback sacked', 'Rushing TD', 'Passing TD', 'quarterback sneak',
    'Pass interference called', 'Offensive holding called',
)


def seed_phrases(phrases=DEFAULT_PHRASES) -> int:
    """Populate the phrase pool if it is empty. Returns the number inserted."""
    if db.session.query(Phrase.id).first() is not None:
        return 0
    db.session.add_all([Phrase(value=p) for p in phrases])
    db.session.commit()
    return len(phrases)


def phrase_pool():
    return [p.value for p in Phrase.query.order_by(Phrase.id).all()]
