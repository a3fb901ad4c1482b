# Garante o registro de TODAS as models no mesmo registry (alembic/testes)
from treino.db.base_class import Base  # noqa: F401
from treino.models.agendamento import Agendamento  # noqa: F401
from treino.models.aluno import Aluno  # noqa: F401
from treino.models.assinatura import Assinatura  # noqa: F401
from treino.models.bloco_horario import BlocoHorario  # noqa: F401
from treino.models.evolucao import Evolucao  # noqa: F401
from treino.models.ficha_treino import (  # noqa: F401
    ExercicioFicha,
    FichaAtribuicao,
    FichaTreino,
)
from treino.models.foto_progresso import FotoProgresso  # noqa: F401
from treino.models.pagamento import Pagamento  # noqa: F401
from treino.models.plano_alimentar import PlanoAlimentar  # noqa: F401
from treino.models.treino_pdf import TreinoPdf  # noqa: F401
from treino.models.treino_realizado import TreinoRealizado  # noqa: F401
from treino.models.treino_video import TreinoVideo  # noqa: F401
from treino.models.user import User  # noqa: F401
from treino.models.user_profile import UserProfile  # noqa: F401
