"""
Plot errors of the Pluto series against JPL DE 441 over its valid period.
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import ticker

import tools.misc as misc
from testing import JPL_DE_EPHEMERIS_PATH, PLUTO_VALID_YEARS, pluto_errors_against_jpl_de

PLOT_SAVE_DIRECTORY = R'./images'

def moving_average(data, w):
    """
    Centered moving average with window 2*w-1, window shrinking near the ends.
    """
    n = len(data)
    w = max(1, min(w, n))
    return np.array([np.average(data[max(k-w+1, 0):min(k+w, n)]) for k in range(n)])

def plot_errors(years, angle_errors, radius_errors, title):
    """
    Angular error (arcsec) and radius error (AU) as a function of time.
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
    panels = [
        (ax1, np.asarray(angle_errors) / misc.ARCSEC, R'Angular error [arcsec]'),
        (ax2, np.asarray(radius_errors), R'Radius error [AU]'),
    ]
    for ax, errors, label in panels:
        ax.scatter(years, errors, s=1, color='navy', alpha=0.2)
        ax.plot(years, moving_average(errors, 20), color='red', linewidth=2, label='moving average')
        ax.yaxis.set_major_formatter(ticker.FuncFormatter(lambda val, pos: f'{val:.2g}'))
        ax.set_xlabel('Time [Julian year]', fontsize=14)
        ax.set_ylabel(label, fontsize=14)
        ax.set_axisbelow(True)
        ax.grid()
        ax.legend()

    fig.subplots_adjust(wspace=0.25)
    fig.suptitle(title, fontsize=18)
    return fig

def save_image(fig: plt.Figure, file_path):
    fig.savefig(file_path, dpi=80, bbox_inches='tight')
    print(f'Wrote image to file {file_path}.')
    plt.close(fig)

@misc.time_it
def main():
    years = np.linspace(*PLUTO_VALID_YEARS, 5000)
    with misc.jplephem_position(JPL_DE_EPHEMERIS_PATH) as jpl_position:
        angle_errors, radius_errors = pluto_errors_against_jpl_de(jpl_position, years)
    fig = plot_errors(years, angle_errors, radius_errors, 'PLUTO - Error of Meeus periodic terms w.r.t. JPL DE441')
    save_image(fig, file_path = f'{PLOT_SAVE_DIRECTORY}/error_pluto.jpg')

if __name__ == '__main__':
    main()
