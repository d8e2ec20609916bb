# Constantes globais

# Valores da tag 'oneway' (comparados em minúsculas, sem espaços)
ONEWAY_FORWARD_VALUES = {"yes", "true", "1"}
ONEWAY_BACKWARD_VALUES = {"-1", "reverse"}

# Papéis que fixam o sentido de percurso do membro (pista dupla / rota dividida)
ROLE_FORWARD = "forward"
ROLE_BACKWARD = "backward"

# Grupos de papéis ordenados antes da ordenação por conectividade
STREET_ROLES = {"street"}
HOUSE_ROLES = {"house", "address"}
STOP_PLATFORM_PREFIXES = ("stop", "platform")
FROM_VIA_TO_ROLES = ("from", "via", "to")

HOUSENUMBER_TAG = "addr:housenumber"
NAME_TAG = "name"

# Log
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
