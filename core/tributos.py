"""
Cálculo das retenções de INSS e IRRF sobre as verbas rescisórias.

INSS: tabela progressiva por faixas (cada faixa tributa apenas a parcela da
base que cai dentro dela), limitada ao teto.

IRRF: uma única faixa se aplica à base inteira, com a parcela a deduzir
garantindo continuidade nas mudanças de faixa.
"""

from typing import Sequence

from core.tabelas import TABELA_INSS, TABELA_IRRF, VALOR_DEPENDENTE_IRRF
from models.regras import FaixaIrrf, TabelaInss


def calcular_inss(base: float, tabela: TabelaInss = TABELA_INSS) -> float:
    """
    Calcula a contribuição previdenciária progressiva.

    Args:
        base: Soma das verbas com incidência de INSS.
        tabela: Tabela progressiva (padrão: INSS 2025).

    Returns:
        Valor da contribuição, sem arredondamento.

    Exemplo:
        >>> round(calcular_inss(1518.00), 2)
        113.85
    """
    base_calculo = min(base, tabela.teto)
    inss = 0.0
    base_restante = base_calculo
    limite_anterior = 0.0

    for faixa in tabela.faixas:
        base_na_faixa = min(base_restante, faixa.ate - limite_anterior)

        if base_na_faixa > 0:
            inss += base_na_faixa * faixa.aliquota
            base_restante -= base_na_faixa

        limite_anterior = faixa.ate
        if base_restante <= 0:
            break

    return inss


def calcular_irrf(
    base: float,
    dependentes: int,
    inss: float,
    tabela: Sequence[FaixaIrrf] = TABELA_IRRF,
    valor_dependente: float = VALOR_DEPENDENTE_IRRF,
) -> float:
    """
    Calcula o imposto de renda retido na fonte.

    A base de cálculo é a base bruta menos o INSS retido e a dedução por
    dependente. A base é arredondada ao centavo antes de localizar a faixa,
    já que os limites da tabela são expressos em centavos.

    Args:
        base: Soma das verbas com incidência de IRRF.
        dependentes: Quantidade de dependentes para dedução.
        inss: INSS já retido sobre as verbas.
        tabela: Faixas do IRRF (padrão: IRRF 2025).
        valor_dependente: Dedução por dependente.

    Returns:
        Valor do imposto, nunca negativo.

    Exemplo:
        >>> round(calcular_irrf(5000.00, 0, 0), 2)
        466.27
    """
    base_calculo = round(base - inss - (dependentes * valor_dependente), 2)

    if base_calculo <= 0:
        return 0.0

    for faixa in tabela:
        if faixa.de <= base_calculo <= faixa.ate:
            return max(0.0, base_calculo * faixa.aliquota - faixa.deduzir)

    return 0.0
