# Importa todos los modelos para que Base.metadata los conozca
from app.db.models.user import User
from app.db.models.driver import Driver
from app.db.models.race import Race
from app.db.models.result import Result
from app.db.models.bet import Bet
