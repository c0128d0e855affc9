"""App: serviços de aplicação do catálogo de cantos.

Subpastas:
- domain/: modelos de domínio (MatchSpan)
- services/: normalização e busca em títulos e letras

Padrão: app executa; ai interpreta respostas do assistente; utils apoia.
"""
