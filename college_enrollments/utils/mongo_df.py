# college_enrollments/utils/mongo_df.py
import pandas as pd


def docs_to_df(docs, columns):
    # columns fixes order; a field missing from a doc shows up as NaN
    return pd.DataFrame(list(docs), columns=list(columns))
