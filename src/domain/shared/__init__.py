"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa. Solo operan
sobre tipos nativos de Python.

Uso:
    from src.domain.shared.money import normalize, parse_money, format_minor_units
    from src.domain.shared.separators import infer_separator_roles, split_amount
    from src.domain.shared.currency_symbols import strip_currency_symbol
    from src.domain.shared.text_cleaner import clean_amount_text
"""
