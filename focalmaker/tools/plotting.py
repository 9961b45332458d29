# -*- coding: utf-8 -*-
"""

A set of useful little plotting functions using
matplotlib.

"""

import logging
import numpy as np
import matplotlib.pyplot as plt
from scipy.integrate import cumulative_trapezoid
from focalmaker.station import Station
from focalmaker.focalmaker import BeachBall

logger = logging.getLogger(__name__)


def ZRTPlot(station, fig=0, show=False, xlim=[], label=None, integrate=0, savefigname="", linestyle="-", linewidth=2, color="k"):
    """Plot (using matplotlib) the response at a given station.

    :param station: The station response to plot.
    :type station: :obj:`focalmaker.Station`
    :param fig: Figure number to plot on.
    :type fig: int.
    :param show: Invoke ``plt.show()``.
    :type show: bool
    :param xlim: Set x-limits to xlim.
    :type xlim: list
    :param label: Line label.
    :type label: string
    :param integrate: Show integral of response (``integrate`` times)
    :type integrate: int

    """
    assert isinstance(station, Station), "station must be an instance of the focalmaker.Station class"

    z, r, t, time = station.get_response()
    for _ in range(integrate):
        z = cumulative_trapezoid(z, time, initial=0.)
        r = cumulative_trapezoid(r, time, initial=0.)
        t = cumulative_trapezoid(t, time, initial=0.)

    if fig == 0:
        fighandle = plt.figure()
    else:
        fighandle = plt.figure(fig)

    names = ["Vertical (Z)", "Radial (R)", "Transverse (T)"]
    for i, comp in enumerate([z, r, t]):
        if i == 0:
            ax0 = plt.subplot(3, 1, i+1)
        else:
            plt.subplot(3, 1, i+1, sharex=ax0)
        plt.plot(time, comp, label=label, linestyle=linestyle, linewidth=linewidth, color=color)
        if len(xlim) == 2:
            plt.xlim(xlim)
        plt.ylabel("Amplitude")
        plt.title(names[i], loc="right", fontsize="small")
    plt.xlabel("Time, $t$ (s)")
    plt.suptitle(station.metadata.get("name", f"Azimuth {station.azimuth:.1f}°"))

    if show:
        plt.show()

    if len(savefigname) > 0:
        plt.savefig(savefigname)

    return fighandle


def BeachBallPlot(ball, fig=0, show=False, lobe=False, savefigname="", axis_length=1.5):
    """Plot (using matplotlib) the focal sphere of a source in 3D.

    Compressional samples are black and dilatational ones white. Nodal
    circles are orange and the P, B, T axes black, blue and red.

    :param ball: The focal mechanism to plot.
    :type ball: :obj:`focalmaker.BeachBall`
    :param fig: Figure number to plot on.
    :type fig: int.
    :param lobe: Also draw the radiation lobe surface as a wireframe.
    :type lobe: bool

    """
    assert isinstance(ball, BeachBall), "ball must be an instance of the focalmaker.BeachBall class"

    if fig == 0:
        fighandle = plt.figure()
    else:
        fighandle = plt.figure(fig)
    ax = fighandle.add_subplot(111, projection='3d')

    if ball.samples:
        pos = np.array([s.direction for s in ball.samples])
        colors = ["black" if s.is_compressional else "white" for s in ball.samples]
        ax.scatter(pos[:, 0], pos[:, 1], pos[:, 2], c=colors, s=2, edgecolors="gray", linewidths=0.2)

    for circle in ball.nodal_circles:
        ax.plot(circle[:, 0], circle[:, 1], circle[:, 2], color="orange")

    for (name, _, vector), color in zip(ball.axes, ["black", "blue", "red"]):
        for v in (vector, -vector):
            ax.plot([0, axis_length*v[0]], [0, axis_length*v[1]], [0, axis_length*v[2]], color=color)
        ax.text(*(1.1*axis_length*vector), name, color=color)

    if lobe:
        mesh = ball.lobe
        xyz = mesh.vertices.reshape(mesh.shape + (3,))
        scale = np.abs(xyz).max()
        ax.plot_wireframe(xyz[..., 0]/scale, xyz[..., 1]/scale, xyz[..., 2]/scale,
                          color="#9999ff", linewidth=0.3)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")

    if show:
        plt.show()

    if len(savefigname) > 0:
        plt.savefig(savefigname)

    return fighandle
