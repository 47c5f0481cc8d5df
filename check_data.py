from app.core.database import SessionLocal
from app.models.partida import Partida
from app.services.ranking import get_ranking
from sqlalchemy import func, select

def analizar_datos():
    db = SessionLocal()

    try:
        # 1. Conteo rápido
        total_partidas = db.execute(select(func.count(Partida.id))).scalar_one()
        max_puntos = db.execute(select(func.max(Partida.puntos_del_ganador))).scalar_one()
        print(f"📊 ESTADO DE LA BASE DE DATOS:")
        print(f"   - Partidas registradas: {total_partidas}")
        print(f"   - Máxima puntuación de un ganador: {max_puntos if max_puntos is not None else '-'}")
        print("-" * 50)

        # 2. Top 15 jugadores por victorias
        ranking = get_ranking(db).head(15)
    finally:
        db.close()

    print(f"{'JUGADOR':<35} | {'PJ':<3} | {'V':<3} | {'D':<3} | {'%V':<5} | {'PTS':<5}")
    print("-" * 70)

    for row in ranking.itertuples(index=False):
        print(f"{row.Jugador[:35]:<35} | {row.PJ:<3} | {row.Victorias:<3} | {row.Derrotas:<3} | "
              f"{row.Pct_Victorias:<5} | {row.Puntos_Medios:<5}")

if __name__ == "__main__":
    analizar_datos()
