from config.schema import TermCatalogConfig, TermConfig


def default_terms() -> TermCatalogConfig:
    """Built-in academic calendars, 2022-23 and fall 2023.

    Tuesdays that run on Monday schedule are also listed as holidays, so
    regular Tuesday classes skip them.
    """
    return TermCatalogConfig(
        current="f22",
        terms=[
            TermConfig(
                url_name="f22",
                start_date="2022-09-07",
                h1_end_date="2022-10-28",
                h2_start_date="2022-10-31",
                end_date="2022-12-14",
                monday_schedule_date="2022-10-11",
                holiday_dates=[
                    "2022-09-26",
                    "2022-10-10",
                    "2022-10-11",
                    "2022-11-11",
                    "2022-11-24",
                    "2022-11-25",
                ],
            ),
            TermConfig(
                url_name="i23",
                start_date="2023-01-09",
                h1_end_date="2023-01-13",
                h2_start_date="2023-01-17",
                end_date="2023-02-03",
                holiday_dates=["2023-01-16"],
            ),
            TermConfig(
                url_name="s23",
                start_date="2023-02-06",
                h1_end_date="2023-03-24",
                h2_start_date="2023-04-03",
                end_date="2023-05-16",
                monday_schedule_date="2023-02-21",
                holiday_dates=[
                    "2023-02-20",
                    "2023-02-21",
                    "2023-03-27",   # Spring break
                    "2023-03-28",
                    "2023-03-29",
                    "2023-03-30",
                    "2023-03-31",
                    "2023-04-17",
                ],
            ),
            TermConfig(
                url_name="f23",
                start_date="2023-09-06",
                h1_end_date="2023-10-20",
                h2_start_date="2023-10-23",
                end_date="2023-12-13",
                monday_schedule_date="2023-10-10",
                holiday_dates=[
                    "2023-10-09",
                    "2023-10-10",
                    "2023-11-10",
                    "2023-11-23",
                    "2023-11-24",
                ],
            ),
        ],
    )
