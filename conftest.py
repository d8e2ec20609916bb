"""
Configuração do pytest: garante a raiz do projeto no sys.path para que os
pacotes (osmgraph, classes_de_elementos, ...) sejam importáveis nos testes.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
