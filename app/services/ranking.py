import pandas as pd
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.models.partida import Partida

COLUMNAS = ["id", "ganador", "perdedor", "puntosDelGanador"]

def load_partidas(db: Session) -> pd.DataFrame:
    """Todas las partidas en un DataFrame con los nombres de campo de la API."""
    df = pd.read_sql(select(Partida).order_by(Partida.id), db.bind)
    return df.rename(columns={"puntos_del_ganador": "puntosDelGanador"})[COLUMNAS]

def get_ranking(db: Session) -> pd.DataFrame:
    """
    Clasificación por jugador: partidas jugadas, victorias, derrotas,
    porcentaje de victorias y media de puntos en las victorias.
    Ordenada por victorias y, a igualdad, por porcentaje.
    """
    df = load_partidas(db)
    if df.empty:
        return pd.DataFrame(columns=["Jugador", "PJ", "Victorias", "Derrotas", "Pct_Victorias", "Puntos_Medios"])

    victorias = df.groupby("ganador").agg(
        Victorias=("id", "count"),
        Puntos_Medios=("puntosDelGanador", "mean"),
    )
    derrotas = df.groupby("perdedor").agg(Derrotas=("id", "count"))

    ranking = victorias.join(derrotas, how="outer")
    ranking.index.name = "Jugador"
    ranking = ranking.reset_index()

    ranking[["Victorias", "Derrotas"]] = ranking[["Victorias", "Derrotas"]].fillna(0).astype(int)
    ranking["Puntos_Medios"] = ranking["Puntos_Medios"].fillna(0).round(1)
    ranking["PJ"] = ranking["Victorias"] + ranking["Derrotas"]
    ranking["Pct_Victorias"] = (100 * ranking["Victorias"] / ranking["PJ"]).round(1)

    ranking = ranking.sort_values(["Victorias", "Pct_Victorias", "Jugador"], ascending=[False, False, True])
    return ranking[["Jugador", "PJ", "Victorias", "Derrotas", "Pct_Victorias", "Puntos_Medios"]].reset_index(drop=True)
