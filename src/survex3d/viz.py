from __future__ import annotations
from .models.survey import SurvexData

def plot_survey(survey: SurvexData, mode: str = "plan"):
    """Minimal plan or elevation plot of legs for sanity-checking."""
    import matplotlib.pyplot as plt
    fig, ax = plt.subplots()
    for leg in survey.legs:
        if mode == "plan":
            xs, ys = (leg.start.x, leg.end.x), (leg.start.y, leg.end.y)
        else:
            xs, ys = (leg.start.x, leg.end.x), (leg.start.z, leg.end.z)
        ax.plot(xs, ys, color="0.6" if leg.is_splay else "C0", lw=0.6 if leg.is_splay else 1.2)
    for st in survey.stations:
        y = st.position.y if mode == "plan" else st.position.z
        ax.scatter([st.position.x], [y], s=6, color="C3" if st.is_entrance else "C1")
    ax.set_xlabel("Easting (m)")
    ax.set_ylabel("Northing (m)" if mode == "plan" else "Altitude (m)")
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_title(survey.header.title or "Survex 3D (sanity plot)")
    plt.show()
    return fig
