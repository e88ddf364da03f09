# src/simple_ini/core/__init__.py
"""
Core do simple-ini.

Componentes principais:
    - store    → ConfigStore (endereçamento, acessores tipados, load/write)
    - coercion → conversão texto ↔ tipos
    - types    → resultados explícitos de load/write
    - errors   → hierarquia de exceções
    - io       → criação do parser e movimentação do documento entre disco e memória
    - options  → opções de leitura/escrita (IniOptions)
"""
