# cli/demo.py   (внешний скрипт запуска)

import logging
import sys
import tempfile

from loadpath import MemoryDatastore, NpyDatastore, PathAnalyzer, PathSeries


def main(argv=None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if argv:
        series = PathSeries.from_file(1, argv[0], time_increment=0.02, factor=9.81, prepend_zero=True)
    else:
        series = PathSeries(
            1,
            [0.0, 0.12, 0.31, 0.05, -0.42, -0.18, 0.27, 0.09, -0.03, 0.0],
            time_increment=0.02,
            factor=9.81,
            use_last=False,
        )

    analyzer = PathAnalyzer(series)
    df = analyzer.tabulate(dt=0.005)
    print(df)
    print(analyzer.summary())

    # Передача: первый коммит пишет данные, последующие – только заголовок
    store = MemoryDatastore()
    series.db_tag = store.get_db_tag()
    for commit in (1, 2, 3):
        series.send_self(commit, store)
    print("writes per db_tag:", dict(store.writes))

    with tempfile.TemporaryDirectory() as tmp:
        disk = NpyDatastore(tmp)
        copy = series.get_copy()  # у копии своё состояние передачи
        copy.db_tag = disk.get_db_tag()
        copy.send_self(1, disk)
        restored = PathSeries.blank(tag=1, db_tag=copy.db_tag)
        restored.recv_self(1, disk)
        print("restored:", restored)

    analyzer.plot_samples()
    analyzer.plot_factor(df)


if __name__ == "__main__":
    main()
