"""
Configurações centralizadas do motor de rescisão.

Os valores padrão podem ser sobrescritos por variáveis de ambiente ou por um
arquivo .env na raiz do projeto (veja .env.example).
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Valores de referência
    SALARIO_MINIMO = float(os.getenv("RESCISAO_SALARIO_MINIMO", "1518.00"))
    VALOR_DEPENDENTE_IRRF = float(os.getenv("RESCISAO_VALOR_DEPENDENTE_IRRF", "189.59"))
    HORAS_MENSAIS_PADRAO = float(os.getenv("RESCISAO_HORAS_MENSAIS", "220"))

    # Regras fixas
    DIAS_MES_PADRAO = 30
    LIMITE_EXPERIENCIA_DIAS = 90
    LIMITE_DESCONTO_LIQUIDO = 0.70

    # Logging
    LOG_LEVEL = os.getenv("RESCISAO_LOG_LEVEL", "WARNING")

    @classmethod
    def validate(cls):
        """Valida configurações"""
        for nome in ("SALARIO_MINIMO", "VALOR_DEPENDENTE_IRRF", "HORAS_MENSAIS_PADRAO"):
            if getattr(cls, nome) <= 0:
                raise ValueError(f"Configuração inválida: {nome} deve ser positivo.")
        return True
