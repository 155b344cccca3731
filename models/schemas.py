"""
Schemas Pydantic de entrada e saída do cálculo de rescisão.

DadosRescisao reúne tudo o que o chamador informa sobre o vínculo; o
resultado (ResultadoRescisao) é montado uma única vez pelo motor e não é
alterado depois.
"""

from datetime import date
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from config.settings import Config


TipoVerba = Literal["provento", "desconto"]
TipoContrato = Literal["INDETERMINADO", "DETERMINADO", "EXPERIENCIA"]
TipoAviso = Literal["TRABALHADO", "INDENIZADO", "AUSENCIA_DISPENSA"]
BaseCalculoNaoTributavel = Literal[
    "remuneracao", "salario_base", "salario_minimo", "custom", "assistencial"
]


class VerbaNaoTributavel(BaseModel):
    """Provento ou desconto livre que afeta apenas o líquido (sem INSS/IRRF/FGTS)."""

    descricao: str = Field(
        default="",
        description="Descrição do item (ex: 'Auxílio creche', 'Empréstimo consignado')"
    )
    tipo: TipoVerba = Field(description="'provento' ou 'desconto'")
    natureza: Literal["fixo", "percentual"] = Field(
        default="fixo",
        description="'fixo' para valor em reais, 'percentual' para % sobre uma base"
    )
    valor: float = Field(
        default=0.0,
        description="Valor em reais (fixo) ou percentual (ex: 6 para 6%)"
    )
    base_tipo: BaseCalculoNaoTributavel = Field(
        default="remuneracao",
        description=(
            "Base dos itens percentuais: 'remuneracao' (salário + médias), "
            "'salario_base', 'salario_minimo', 'custom' (usa base_custom) ou "
            "'assistencial' (salário assistencial, padrão igual ao salário base)"
        )
    )
    base_custom: Optional[float] = Field(
        default=None,
        description="Base personalizada, usada quando base_tipo = 'custom'"
    )


class DadosRescisao(BaseModel):
    """
    Dados de entrada para o cálculo de uma rescisão trabalhista.

    Percentuais de adicionais (quebra de caixa, noturno) são frações
    decimais: 0.2 = 20%. Campos "_editado" substituem o valor calculado
    quando informados com valor não negativo; negativos são ignorados.
    """

    model_config = ConfigDict(frozen=True)

    # Vínculo
    salario_base: float = Field(ge=0, description="Último salário base contratual")
    data_admissao: date = Field(description="Data de admissão")
    data_desligamento: date = Field(description="Data do desligamento")
    motivo_codigo: str = Field(description="Código do motivo de rescisão (ex: '02')")
    tipo_contrato: TipoContrato = Field(default="INDETERMINADO")
    tipo_aviso: TipoAviso = Field(default="INDENIZADO")
    dias_trabalhados: int = Field(
        default=0, ge=0,
        description="Dias trabalhados no mês do desligamento (saldo de salário)"
    )
    periodos_ferias_vencidas: int = Field(default=0, ge=0)
    saldo_fgts: float = Field(default=0.0, ge=0, description="Saldo do FGTS para a multa rescisória")
    dependentes_irrf: int = Field(default=0, ge=0)
    media_variaveis: float = Field(
        default=0.0, ge=0,
        description="Média das variáveis dos últimos 12 meses (integra a remuneração de referência)"
    )
    desconto_aviso_dias: int = Field(
        default=0, ge=0,
        description="Dias de aviso não cumprido a descontar (pedido de demissão)"
    )
    data_termino_contrato: Optional[date] = Field(
        default=None,
        description="Término previsto do contrato a termo (obrigatório no Art. 479)"
    )

    # Variáveis do mês
    horas_mensais: float = Field(
        default=Config.HORAS_MENSAIS_PADRAO, ge=0,
        description="Divisor de horas mensais (220, 110...)"
    )
    quebra_caixa_percentual: float = Field(default=0.0, ge=0)
    ats: float = Field(default=0.0, ge=0, description="Adicional por tempo de serviço")
    comissoes: float = Field(default=0.0, ge=0)
    insalubridade: float = Field(default=0.0, ge=0)
    gratificacoes: float = Field(default=0.0, ge=0)
    periculosidade: float = Field(default=0.0, ge=0)
    horas_extras_50: float = Field(default=0.0, ge=0)
    horas_extras_100: float = Field(default=0.0, ge=0)
    horas_noturnas: float = Field(default=0.0, ge=0, description="Horas noturnas de relógio")
    adicional_noturno_percentual: float = Field(default=0.0, ge=0)
    dsr_dias_uteis: int = Field(default=0, ge=0)
    dsr_dias_nao_uteis: int = Field(default=0, ge=0, description="Domingos e feriados do mês")

    # Valores editados
    dias_aviso_editado: Optional[int] = None
    justificativa_aviso_editado: Optional[str] = None
    avos_ferias_editado: Optional[int] = Field(default=None, le=12)
    avos_13_editado: Optional[int] = Field(default=None, le=12)
    ferias_vencidas_editado: Optional[float] = None
    ferias_proporcionais_editado: Optional[float] = None
    decimo_terceiro_editado: Optional[float] = None

    # Itens não tributáveis
    salario_assistencial: Optional[float] = Field(
        default=None,
        description="Base 'assistencial' dos itens percentuais; ausente, usa o salário base"
    )
    verbas_nao_tributaveis: List[VerbaNaoTributavel] = Field(default_factory=list)


class DetalheCalculo(BaseModel):
    """Memória de cálculo de uma verba."""

    model_config = ConfigDict(frozen=True)

    descricao: str
    formula: str
    valores: Dict[str, Union[float, str]] = Field(default_factory=dict)


class Verba(BaseModel):
    """Uma linha do termo de rescisão."""

    model_config = ConfigDict(frozen=True)

    rubrica: str
    descricao: str
    valor: float
    tipo: TipoVerba
    incide_inss: bool = False
    incide_irrf: bool = False
    incide_fgts: bool = False
    detalhes: Optional[DetalheCalculo] = None
    valor_calculado: Optional[float] = None
    valor_editado: bool = False
    limitado: bool = Field(
        default=False,
        description="Desconto reduzido ao limite de 70% do líquido"
    )


class ResultadoRescisao(BaseModel):
    """Resultado completo do cálculo de rescisão."""

    model_config = ConfigDict(frozen=True)

    motivo_codigo: str
    motivo_descricao: str
    categoria: str

    verbas: List[Verba]
    total_proventos: float = Field(description="Soma dos proventos, incluindo a multa do FGTS")
    total_descontos: float = Field(description="Soma dos descontos, incluindo INSS e IRRF")
    liquido: float
    inss: float
    irrf: float
    base_inss: float
    base_irrf: float
    multa_fgts: float

    # Aviso prévio
    dias_aviso: int
    dias_aviso_calculado: int
    dias_aviso_editado: bool

    # Avos
    avos_ferias: int
    avos_ferias_calculado: int
    avos_13: int
    avos_13_calculado: int

    # Tempo de serviço
    anos_completos: int
    dias_vinculo: int
    meses_vinculo: int
    tempo_servico: Dict[str, int]

    # Bases e variáveis
    remuneracao_referencia: float
    base_hora_extra: float
    valor_hora: float
    dsr_horas_extras: float
    dsr_comissoes: float
    dsr_total: float
    dsr_dias_uteis: int
    dsr_dias_nao_uteis: int
    total_horas_extras: float
    total_comissoes: float
    total_variaveis: float

    observacoes: List[str] = Field(default_factory=list)
