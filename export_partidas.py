import pandas as pd
from app.core.database import SessionLocal
from app.services.ranking import get_ranking, load_partidas

def main():
    print("📊 Exportando partidas y clasificación...")
    db = SessionLocal()

    try:
        df = load_partidas(db)
        if df.empty:
            print("❌ No hay partidas en la base de datos.")
            return
        ranking = get_ranking(db)
    finally:
        db.close()

    filename = "partidas.xlsx"

    # Exportamos a Excel (una hoja por tabla)
    # Necesitas instalar openpyxl: pip install openpyxl
    try:
        with pd.ExcelWriter(filename) as writer:
            df.to_excel(writer, sheet_name="Partidas", index=False)
            ranking.to_excel(writer, sheet_name="Ranking", index=False)
        print(f"✅ {len(df)} partidas exportadas a: {filename}")
    except ImportError:
        print("❌ Error: Necesitas instalar openpyxl (`pip install openpyxl`)")
        # Fallback a CSV
        df.to_csv("partidas.csv", index=False)
        ranking.to_csv("ranking.csv", index=False)
        print("✅ Datos exportados a CSV en su lugar (partidas.csv, ranking.csv).")

if __name__ == "__main__":
    main()
