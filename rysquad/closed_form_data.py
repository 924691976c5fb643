"""
fitted coefficients of the Rys roots and weights of orders 1 to 5

The tables are stored row-wise with the highest power first (Horner order), one column per fitted
quantity. A table `ORDER<n>_UPTO<b>` belongs to the segment of order n ending at x = b, the `_INV`
tables hold polynomials in 1/x, the `_W` tables additional weight columns.

At the end of this module the tables are assembled into `SEGMENTS`, for each order the ordered list of
x-segments interpreted by `closed_form.py`.
"""

# python import
import collections

########################################################################################################################
##    coefficient tables
########################################################################################################################

ORDER2_UPTO1 = [
    [0.0, 0.0, -8.36313918003957e-08, 0.0],
    [-2.35234358048491e-09, -2.47404902329170e-08, 1.21222603512827e-06, 0.0],
    [2.49173650389842e-08, 2.36809910635906e-07, -1.15662609053481e-05, 0.0],
    [-4.558315364581e-08, 1.835367736310e-06, 9.25197374512647e-05, 0.0],
    [-2.447252174587e-06, -2.066168802076e-05, -6.40994113129432e-04, 0.0],
    [4.743292959463e-05, -1.345693393936e-04, 3.78787044215009e-03, 0.0],
    [-5.33184749432408e-04, -5.88154362858038e-05, -1.85185172458485e-02, 0.0],
    [4.44654947116579e-03, 5.32735082098139e-02, 7.14285713298222e-02, 0.0],
    [-2.90430236084697e-02, -6.37623643056745e-01, -1.99999999997023e-01, 0.0],
    [1.30693606237085e-01, 2.86930639376289e+00, 3.33333333333318e-01, 0.0],
]

ORDER2_UPTO3 = [
    [0.0, 0.0, -1.61702782425558e-10, 0.0],
    [-6.36859636616415e-12, 1.45331350488343e-10, 1.96215250865776e-09, 0.0],
    [8.47417064776270e-11, 2.07111465297976e-09, -2.14234468198419e-08, 0.0],
    [-5.152207846962e-10, -1.878920917404e-08, 2.17216556336318e-07, 0.0],
    [-3.846389873308e-10, -1.725838516261e-07, -1.98850171329371e-06, 0.0],
    [8.472253388380e-08, 2.247389642339e-06, 1.62429321438911e-05, 0.0],
    [-1.85306035634293e-06, 9.76783813082564e-06, -1.16740298039895e-04, 0.0],
    [2.47191693238413e-05, -1.93160765581969e-04, 7.24888732052332e-04, 0.0],
    [-2.49018321709815e-04, -1.58064140671893e-03, -3.79490003707156e-03, 0.0],
    [2.19173220020161e-03, 4.85928174507904e-02, 1.61723488664661e-02, 0.0],
    [-1.63329339286794e-02, -4.30761584997596e-01, -5.29428148329736e-02, 0.0],
    [8.68085688285261e-02, 1.80400974537950e+00, 1.15702180856167e-01, 0.0],
]

ORDER2_UPTO5 = [
    [0.0, 0.0, -2.62453564772299e-11, 0.0],
    [0.0, -1.80555625241001e-10, 3.24031041623823e-10, 0.0],
    [-4.11560117487296e-12, 5.44072475994123e-10, -3.614965656163e-09, 0.0],
    [7.10910223886747e-11, 1.603498045240e-08, 3.760256799971e-08, 0.0],
    [-1.73508862390291e-09, -1.497986283037e-07, -3.553558319675e-07, 0.0],
    [5.93066856324744e-08, -7.017002532106e-07, 3.022556449731e-06, 0.0],
    [-9.76085576741771e-07, 1.85882653064034e-05, -2.290098979647e-05, 0.0],
    [1.08484384385679e-05, -2.04685420150802e-05, 1.526537461148e-04, 0.0],
    [-1.12608004981982e-04, -2.49327728643089e-03, -8.81947375894379e-04, 0.0],
    [1.16210907653515e-03, 3.56550690684281e-02, 4.33207949514611e-03, 0.0],
    [-9.89572595720351e-03, -2.60417417692375e-01, -1.75257821619926e-02, 0.0],
    [6.12589701086408e-02, 1.12155283108289e+00, 5.28406320615584e-02, 0.0],
]

ORDER2_UPTO10 = [
    [-1.43632730148572e-16, 0.0, 0.0, 0.0],
    [2.38198922570405e-16, 2.48791622798900e-14, 0.0, 0.0],
    [1.358319618800e-14, -1.36113510175724e-13, 0.0, 0.0],
    [-7.064522786879e-14, -2.224334349799e-12, 0.0, 0.0],
    [-7.719300212748e-13, 4.190559455515e-11, 0.0, 0.0],
    [7.802544789997e-12, -2.222722579924e-10, 0.0, 0.0],
    [6.628721099436e-11, -2.624183464275e-09, 0.0, 0.0],
    [-1.775564159743e-09, 6.128153450169e-08, 0.0, 0.0],
    [1.713828823990e-08, -4.383376014528e-07, 0.0, 0.0],
    [-1.497500187053e-07, -2.49952200232910e-06, 0.0, 0.0],
    [2.283485114279e-06, 1.03236647888320e-04, 0.0, 0.0],
    [-3.76953869614706e-05, -1.44614664924989e-03, 0.0, 0.0],
    [4.74791204651451e-04, 1.35094294917224e-02, 0.0, 0.0],
    [-4.60448960876139e-03, -9.53478510453887e-02, 0.0, 0.0],
    [3.72458587837249e-02, 5.44765245686790e-01, 0.0, 0.0],
]

ORDER2_UPTO15 = [
    [-1.01041157064226e-05, 0.0, 0.0, 0.0],
    [1.19483054115173e-03, 3.39024225137123e-04, 0.0, 0.0],
    [-6.73760231824074e-02, -9.34976436343509e-02, 0.0, 0.0],
    [1.25705571069895e+00, -4.22216483306320e+00, 0.0, 0.0],
]

ORDER2_UPTO15_INV = [
    [-8.57609422987199e+03, -2.08457050986847e+03, 0.0, 0.0],
    [5.91005939591842e+03, -1.04999071905664e+03, -1.8784686463512e-01, 0.0],
    [-1.70807677109425e+03, 3.39891508992661e+02, 2.2991849164985e-01, 0.0],
    [2.64536689959503e+02, -1.56184800325063e+02, -4.9893752514047e-01, 0.0],
    [-2.38570496490846e+01, 8.00839033297501e+00, -2.1916512131607e-05, 0.0],
]

ORDER2_UPTO33 = [
    [-1.14906395546354e-06, 0.0, 0.0, 0.0],
    [1.76003409708332e-04, 3.64921633404158e-04, 0.0, 0.0],
    [-1.71984023644904e-02, -9.71850973831558e-02, 0.0, 0.0],
    [-1.37292644149838e-01, -4.02886174850252e+00, 0.0, 0.0],
]

ORDER2_UPTO33_INV = [
    [-4.75742064274859e+01, -1.35831002139173e+02, 1.9623264149430e-01, 0.0],
    [9.21005186542857e+00, -8.66891724287962e+01, -4.9695241464490e-01, 0.0],
    [-2.31080873898939e-02, 2.98011277766958e+00, -6.0156581186481e-05, 0.0],
]

ORDER2_UPTO40 = [
    [-8.78947307498880e-01, -9.28903924275977e+00, 4.46857389308400e+00, 0.0],
    [1.09243702330261e+01, 8.10642367843811e+01, -7.79250653461045e+01, 0.0],
]

ORDER3_UPTO1 = [
    [0.0, 0.0, 0.0, -7.60911486098850e-08],
    [0.0, 0.0, 0.0, 1.09552870123182e-06],
    [-5.10186691538870e-10, -1.29646524960555e-08, -9.28536484109606e-09, -1.03463270693454e-05],
    [2.40134415703450e-08, 7.74602292865683e-08, -3.02786290067014e-07, 8.16324851790106e-05],
    [-5.01081057744427e-07, 1.56022811158727e-06, -2.50734477064200e-06, -5.55526624875562e-04],
    [7.58291285499256e-06, -1.58051990661661e-05, -7.32728109752881e-06, 3.20512054753924e-03],
    [-9.55085533670919e-05, -3.30447806384059e-04, 2.44217481700129e-04, -1.51515139838540e-02],
    [1.02893039315878e-03, 9.74266885190267e-03, 4.94758452357327e-02, 5.55555554649585e-02],
    [-9.28875764374337e-03, -1.19511285526388e-01, -1.02504611065774e+00, -1.42857142854412e-01],
    [6.03769246832810e-02, 7.76823355931033e-01, 6.66279971938553e+00, 1.99999999999986e-01],
]

ORDER3_UPTO3 = [
    [0.0, 0.0, 0.0, -1.48044231072140e-10],
    [0.0, 0.0, 0.0, 1.78157031325097e-09],
    [1.44687969563318e-12, 0.0, -2.81496588401439e-10, -1.92514145088973e-08],
    [4.85300143926755e-12, 6.95964248788138e-10, 3.61058041895031e-09, 1.92804632038796e-07],
    [-6.55098264095516e-10, -5.35281831445517e-09, 4.53631789436255e-08, -1.73806555021045e-06],
    [1.56592951656828e-08, -6.745205954533e-08, -1.40971837780847e-07, 1.39195169625425e-05],
    [-2.60122498274734e-07, 1.502366784525e-06, -6.05865557561067e-06, -9.74574633246452e-05],
    [3.86118485517386e-06, 9.923326947376e-07, -5.15964042227127e-05, 5.83701488646511e-04],
    [-5.13430986707889e-05, -3.89147469249594e-04, 3.34761560498171e-05, -2.89955494844975e-03],
    [6.03194524398109e-04, 7.51549330892401e-03, 5.04871005319119e-02, 1.13847001113810e-02],
    [-6.11219349825090e-03, -8.48778120363400e-02, -8.24708946991557e-01, -3.23446977320647e-02],
    [4.52578254679079e-02, 5.73928229597613e-01, 4.81234667357205e+00, 5.29428148329709e-02],
]

ORDER3_UPTO5 = [
    [0.0, 0.0, 0.0, -2.36788772599074e-11],
    [0.0, 0.0, 0.0, 2.89147476459092e-10],
    [0.0, -2.65526039155651e-11, -3.92833750584041e-10, -3.18111322308846e-09],
    [1.44265709189601e-11, 1.97549041402552e-10, -4.16423229782280e-09, 3.25336816562485e-08],
    [-4.66622033006074e-10, 2.15971131403034e-09, 4.42413039572867e-08, -3.00873821471489e-07],
    [7.649155832025e-09, -7.95045680685193e-08, 6.40574545989551e-07, 2.48749160874431e-06],
    [-1.229940017368e-07, 5.15021914287057e-07, -3.05512456576552e-06, -1.81353179793672e-05],
    [2.026002142457e-06, 1.11788717230514e-05, -1.05296443527943e-04, 1.14504948737066e-04],
    [-2.87048671521677e-05, -3.33739312603632e-04, -6.14120969315617e-04, -6.10614987696677e-04],
    [3.70326938096287e-04, 5.30601428208358e-03, 4.89665802767005e-02, 2.64584212770942e-03],
    [-4.21006346373634e-03, -5.93483267268959e-02, -6.24498381002855e-01, -8.66415899015349e-03],
    [3.50898470729044e-02, 4.31180523260239e-01, 3.36412312243724e+00, 1.75257821619922e-02],
]

ORDER3_UPTO10 = [
    [0.0, 0.0, 6.66339416996191e-15, 0.0],
    [5.74429401360115e-16, 1.13464096209120e-14, 1.84955640200794e-13, 0.0],
    [7.11884203790984e-16, 6.99375313934242e-15, -1.985141104444e-12, 0.0],
    [-6.736701449826e-14, -8.595618132088e-13, -2.309293727603e-11, 0.0],
    [-6.264613873998e-13, -5.293620408757e-12, 3.917984522103e-10, 0.0],
    [1.315418927040e-11, -2.492175211635e-11, 1.663165279876e-09, 0.0],
    [-4.23879635610964e-11, 2.73681574882729e-09, -6.205591993923e-08, 0.0],
    [1.39032379769474e-09, -1.06656985608482e-08, 8.769581622041e-09, 0.0],
    [-4.65449552856856e-08, -4.40252529648056e-07, 8.97224398620038e-06, 0.0],
    [7.34609900170759e-07, 9.68100917793911e-06, -3.14232666170796e-05, 0.0],
    [-1.08656008854077e-05, -1.68211091755327e-04, -1.83917335649633e-03, 0.0],
    [1.77930381549953e-04, 2.69443611274173e-03, 3.51246831672571e-02, 0.0],
    [-2.39864911618015e-03, -3.23845035189063e-02, -3.22335051270860e-01, 0.0],
    [2.39112249488821e-02, 2.75969447451882e-01, 1.73582831755430e+00, 0.0],
]

ORDER3_UPTO15 = [
    [0.0, 0.0, 3.20622388697743e-15, 0.0],
    [4.42133001283090e-16, 6.85146742119357e-15, -2.73458804864628e-14, 0.0],
    [-2.77189767070441e-15, -1.08257654410279e-14, -3.157134329361e-13, 0.0],
    [-4.084026087887e-14, -8.579165965128e-13, 8.654129268056e-12, 0.0],
    [5.379885121517e-13, 6.642452485783e-12, -5.625235879301e-11, 0.0],
    [1.882093066702e-12, 4.798806828724e-11, -7.718080513708e-10, 0.0],
    [-8.67286219861085e-11, -1.13413908163831e-09, 2.064664199164e-08, 0.0],
    [7.11372337079797e-10, 7.08558457182751e-09, -1.567725007761e-07, 0.0],
    [-3.55578027040563e-09, -5.59678576054633e-08, -1.57938204115055e-06, 0.0],
    [1.29454702851936e-07, 2.51020389884249e-06, 6.27436306915967e-05, 0.0],
    [-4.14222202791434e-06, -6.63678914608681e-05, -1.01308723606946e-03, 0.0],
    [8.04427643593792e-05, 1.11888323089714e-03, 1.13901881430697e-02, 0.0],
    [-1.18587782909876e-03, -1.45361636398178e-02, -1.01449652899450e-01, 0.0],
    [1.53435577063174e-02, 1.65077877454402e-01, 7.77203937334739e-01, 0.0],
]

ORDER3_UPTO20 = [
    [-2.43270989903742e-06, 0.0, 0.0, 0.0],
    [3.57901398988359e-04, -2.62627010965435e-04, 9.31856404738601e-05, 0.0],
    [-2.34112415981143e-02, 3.49187925428138e-02, -2.87029400759565e-02, 0.0],
    [7.81425144913975e-01, -3.09337618731880e+00, -7.83503697918455e-01, 0.0],
    [-1.73209218219175e+01, 1.07037141010778e+02, -1.84338896480695e+01, 0.0],
    [2.43517435690398e+02, -2.36659637247087e+03, 4.04996712650414e+02, 0.0],
]

ORDER3_UPTO20_INV = [
    [0.0, -2.91669113681020e+06, 0.0, 0.0],
    [-1.97611541576986e+04, 1.41129505262758e+06, -1.89829509315154e+05, 1.9623264149430e-01],
    [9.82441363463929e+03, -2.91532335433779e+05, 5.11498390849158e+04, -4.9695241464490e-01],
    [-2.07970687843258e+03, 3.35202872835409e+04, -6.88145821789955e+03, -6.0156581186481e-05],
]

ORDER3_UPTO33 = [
    [-4.97561537069643e-04, -4.48218898474906e-03, -1.38368602394293e-02, 0.0],
    [-5.00929599665316e-02, -5.17373211334924e-01, -1.77293428863008e+00, 0.0],
    [1.31099142238996e+00, 1.13691058739678e+01, 1.73639054044562e+01, 0.0],
    [-1.88336409225481e+01, -1.65426392885291e+02, -3.57615122086961e+02, 0.0],
]

ORDER3_UPTO47 = [
    [-7.39058467995275e+00, -7.38726243906513e+01, -2.63750565461336e+02, 6.15072615497811e+01],
    [3.21318352526305e+02, 3.13569966333873e+03, 1.04412168692352e+04, -2.91980647450269e+03],
    [-3.99433696473658e+03, -3.86862867311321e+04, -1.28094577915394e+05, 3.80794303087338e+04],
]

ORDER4_UPTO1 = [
    [0.0, 0.0, 0.0, 4.99660550769508e-09, 0.0, 0.0, 0.0, 0.0],
    [0.0, -4.11720483772634e-09, -3.41688436990215e-08, -7.94585963310120e-08, 0.0, 0.0, 0.0, 0.0],
    [0.0, 6.54963481852134e-08, 5.07238960340773e-07, 8.359072409485e-07, 0.0, 0.0, 0.0, 0.0],
    [-1.14649303201279e-08, -7.20045285129626e-07, -5.01675628408220e-06, -7.422369210610e-06, -1.95309614628539e-10, 0.0, 1.77280535300416e-09, 0.0],
    [1.88015570196787e-07, 6.93779646721723e-06, 4.20363420922845e-05, 5.763374308160e-05, 5.19765728707592e-09, -1.89554881382342e-08, 3.36524958870615e-08, -5.61188882415248e-08],
    [-2.33305875372323e-06, -6.05367572016373e-05, -3.08040221166823e-04, -3.86645606718233e-04, -1.01756452250573e-07, 3.07583114342365e-07, -2.58341529013893e-07, -2.49480733072460e-07],
    [2.68880044371597e-05, 4.74241566251899e-04, 1.94431864731239e-03, 2.18417516259781e-03, 1.72365935872131e-06, 1.270981734393e-06, -1.13644895662320e-05, 3.428685057114e-06],
    [-2.94268428977387e-04, -3.26956188125316e-03, -1.02477820460278e-02, -9.99791027771119e-03, -2.61203523522184e-05, -1.417298563884e-04, -7.91549618884063e-05, 1.679007454539e-04],
    [3.06548909776613e-03, 1.91883866626681e-02, 4.28670143840073e-02, 3.48791097377370e-02, 3.52921308769880e-04, 3.226979163176e-03, 1.03825827346828e-02, 4.722855585715e-02],
    [-3.13844305680096e-02, -8.98046242565811e-02, -1.29314370962569e-01, -8.28299075413889e-02, -4.09645850658433e-03, -4.48902570678178e-02, -2.04389090525137e-01, -1.39368301737828e+00],
    [3.62683783378335e-01, 3.13706645877886e-01, 2.22381034453369e-01, 1.01228536290376e-01, 3.48198973061469e-02, 3.81567185080039e-01, 1.73730726945889e+00, 1.18463056481543e+01],
]

ORDER4_UPTO5 = [
    [0.0, 0.0, 0.0, -9.74835552342257e-16, 0.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 9.06812118895365e-15, 1.57857099317175e-14, 0.0, 0.0, 0.0, 0.0],
    [0.0, -1.46345073267549e-14, -1.40541322766087e-13, -2.249993780112e-13, 0.0, 0.0, 0.0, 0.0],
    [0.0, 2.25644205432182e-13, 1.919270015269e-12, 3.173422008953e-12, 0.0, 0.0, 0.0, 0.0],
    [-4.65801912689961e-14, -3.116258693847e-12, -2.605135739010e-11, -4.161159459680e-11, 0.0, 0.0, 0.0, 0.0],
    [7.58669507106800e-13, 4.321908756610e-11, 3.299685839012e-10, 5.021343560166e-10, -1.48570633747284e-15, 1.35830583483312e-13, 5.02799392850289e-13, -1.08510370291979e-12],
    [-1.186387548048e-11, -5.673270062669e-10, -3.86354139348735e-09, -5.545047534808e-09, -1.33273068108777e-13, -2.29772605964836e-12, 1.07461812944084e-11, 6.41492397277798e-11],
    [1.862334710665e-10, 7.006295962960e-09, 4.16265847927498e-08, 5.554146993491e-08, 4.068543696670e-12, -3.821500128045e-12, -1.482277886411e-10, 7.542387436125e-10],
    [-2.799399389539e-09, -8.120186517000e-08, -4.09462835471470e-07, -4.99048696190133e-07, -9.163164161821e-11, 6.844424214735e-10, -2.153585661215e-09, -2.213111836647e-09],
    [4.148972684255e-08, 8.775294645770e-07, 3.64018881086111e-06, 3.96650392371311e-06, 2.046819017845e-09, -1.048063352259e-08, 3.654087802817e-08, -1.448228963549e-07],
    [-5.933568079600e-07, -8.77829235749024e-06, -2.88665153269386e-05, -2.73816413291214e-05, -4.03076426299031e-08, 1.50083186233363e-08, 5.15929575830120e-07, -1.95670833237101e-06],
    [8.168349266115e-06, 8.04372147732379e-05, 2.00515819789028e-04, 1.60106988333186e-04, 7.29407420660149e-07, 3.48848942324454e-06, -9.52388379435709e-06, -1.07481314670844e-05],
    [-1.08989176177409e-04, -6.64149238804153e-04, -1.18791896897934e-03, -7.64560567879592e-04, -1.23118059980833e-05, -1.08694174399193e-04, -2.16552440036426e-04, 1.49335941252765e-04],
    [1.41357961729531e-03, 4.81181506827225e-03, 5.75223633388589e-03, 2.81330044426892e-03, 1.88796581246938e-04, 2.08048885251999e-03, 9.03551469568320e-03, 4.87791531990593e-02],
    [-1.87588361833659e-02, -2.88982669486183e-02, -2.09400418772687e-02, -7.16227030134947e-03, -2.53262912046853e-03, -2.91205805373793e-02, -1.45505469175613e-01, -1.10559909038653e+00],
    [2.89898651436026e-01, 1.56247249979288e-01, 4.85368861938873e-02, 9.66077262223353e-03, 2.51198234505021e-02, 2.72276489515713e-01, 1.21449092319186e+00, 8.09502028611780e+00],
]

ORDER4_UPTO10 = [
    [0.0, 0.0, 0.0, -1.55714130075679e-17, 0.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 1.64742458534277e-16, 2.57193722698891e-16, 0.0, 0.0, 0.0, 0.0],
    [0.0, -3.57248951192047e-16, -2.68512265928410e-15, -3.626606654097e-15, 0.0, 0.0, 0.0, 0.0],
    [0.0, 6.25708409149331e-15, 3.788890667676e-14, 5.234734676175e-14, 0.0, 0.0, 0.0, -1.62212382394553e-14],
    [-1.65995045235997e-15, -9.657033089714e-14, -5.508918529823e-13, -7.067105402134e-13, 0.0, 0.0, 2.93523563363000e-14, 7.68943641360593e-13],
    [6.91838935879598e-14, 1.507864898748e-12, 7.555896810069e-12, 8.793512664890e-12, 4.64217329776215e-15, 2.93981127919047e-14, -6.40041776667020e-14, 5.764015756615e-12],
    [-9.131223418888e-13, -2.332522256110e-11, -9.69039768312637e-11, -1.006088923498e-10, -6.27892383644164e-15, 8.47635639065744e-13, -2.695740446312e-12, -1.380635298784e-10],
    [1.403341829454e-11, 3.428545616603e-10, 1.16034263529672e-09, 1.050565098393e-09, 3.462236347446e-13, -1.446314544774e-11, 1.027082960169e-10, -1.476849808675e-09],
    [-3.672235069444e-10, -4.698730937661e-09, -1.28771698573873e-08, -9.91517881772662e-09, -2.927229355350e-11, -6.149155555753e-12, -5.822038656780e-10, 1.84347052385605e-08],
    [6.366962546990e-09, 6.219977635130e-08, 1.31949431805798e-07, 8.35835975882941e-08, 5.090355371676e-10, 8.484275604612e-10, -3.159991002539e-08, 3.34382940759405e-07],
    [-1.039220021671e-07, -7.83008889613661e-07, -1.23673915616005e-06, -6.19785782240693e-07, -9.97272656345253e-09, -6.10898827887652e-08, 4.327249251331e-07, -1.39428366421645e-06],
    [1.959098751715e-06, 9.08621687041567e-06, 1.04189803544936e-05, 3.95841149373135e-06, 2.37835295639281e-07, 2.39156093611106e-06, 4.856768455119e-06, -7.50249313713996e-05],
    [-3.33474893152939e-05, -9.86368311253873e-05, -7.79566003744742e-05, -2.11366761402403e-05, -4.60301761310921e-06, -5.35837089462592e-05, -2.54617989427762e-04, -6.26495899187507e-04],
    [5.72164211151013e-04, 9.69632496710088e-04, 5.03162624754434e-04, 9.00474771229507e-05, 8.42824204233222e-05, 1.00967602595557e-03, 5.54843378106589e-03, 4.69716410901162e-02],
    [-1.05583210553392e-02, -8.14594214284187e-03, -2.55138844587555e-03, -2.78777909813289e-04, -1.37983082233081e-03, -1.57769317127372e-02, -7.95013029486684e-02, -6.66871297428209e-01],
    [2.26696066029591e-01, 8.50218447733457e-02, 1.13250730954014e-02, 5.26543779837487e-04, 1.66630865869375e-02, 1.74853819464285e-01, 7.20206142703162e-01, 4.11207530217806e+00],
]

ORDER4_UPTO15 = [
    [0.0, 0.0, 0.0, 2.90401781000996e-18, 0.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, -4.19569145459480e-17, -4.63389683098251e-17, 0.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 5.94344180261644e-16, 6.274018198326e-16, 4.94869622744119e-17, 4.89224285522336e-16, 0.0, 4.63414725924048e-14],
    [0.0, -6.22272689880615e-15, -1.148797566469e-14, -8.936002188168e-15, 8.03568805739160e-16, 1.06390248099712e-14, 6.12419396208408e-14, -4.72757262693062e-14],
    [0.0, 1.04126809657554e-13, 1.881303962576e-13, 1.194719074934e-13, -5.599125915431e-15, -5.446260182933e-14, 1.12328861406073e-13, -1.001926833832e-11],
    [0.0, -6.842418230913e-13, -2.413554618391e-12, -1.45501321259466e-12, -1.378685560217e-13, -1.613630106295e-12, -9.051094103059e-12, 6.074107718414e-11],
    [0.0, 1.576841731919e-11, 3.372127423047e-11, 1.64090830181013e-11, 7.006511663249e-13, 3.910179118937e-12, -4.781797525341e-11, 1.576976911942e-09],
    [0.0, -4.203948834175e-10, -4.933988617784e-10, -1.71987745310181e-10, 1.30391406991118e-11, 1.90712434258806e-10, 1.660828868694e-09, -2.01186401974027e-08],
    [0.0, 6.287255934781e-09, 6.116545396281e-09, 1.63738403295718e-09, 8.06987313467541e-11, 8.78470199094761e-10, 4.499058798868e-10, -1.84530195217118e-07],
    [0.0, -8.307159819228e-08, -6.69965691739299e-08, -1.39237504892842e-08, -5.20644072732933e-09, -5.97332993206797e-08, -2.519549641933e-07, 5.02333087806827e-06],
    [0.0, 1.356478091922e-06, 7.52380085447161e-07, 1.06527318142151e-07, 7.72794187755457e-08, 9.25750831481589e-07, 4.977444040180e-06, 9.66961790843006e-06],
    [0.0, -2.08065576105639e-05, -8.08708393262321e-06, -7.27634957230524e-07, -1.61512612564194e-06, -2.02362185197088e-05, -1.25858350034589e-04, -1.58522208889528e-03],
    [0.0, 2.52396730332340e-04, 6.88603417296672e-05, 4.12159381310339e-06, 4.15083811185831e-05, 4.92341968336776e-04, 2.70279176970044e-03, 2.80539673938339e-02],
    [0.0, -2.94484050194539e-03, -4.67067112993427e-04, -1.74648169719173e-05, -7.87855975560199e-04, -8.68438439874703e-03, -3.99327850801083e-02, -2.78953904330072e-01],
    [0.0, 6.01396183129168e-02, 5.42313365864597e-03, 8.50290130067818e-05, 1.14189319050009e-02, 1.15825965127958e-01, 4.33467200855434e-01, 1.82835655238235e+00],
]

ORDER4_UPTO20 = [
    [0.0, -1.86506057729700e-16, -5.54451040921657e-17, -7.56882223582704e-19, 4.36701759531398e-17, 4.98913142288158e-16, 1.91498302509009e-15, -5.43697691672942e-15],
    [0.0, 1.16661114435809e-15, 2.68748367250999e-16, 7.53541779268175e-18, -1.12860600219889e-16, -2.60732537093612e-16, 1.48840394311115e-14, -1.12483395714468e-13],
    [0.0, 2.563712856363e-14, 1.349020069254e-14, -1.157318032236e-16, -6.149849164164e-15, -7.775156445127e-14, -4.316925145767e-13, 2.826607936174e-12],
    [0.0, -4.498350984631e-13, -2.507452792892e-13, 2.411195002314e-15, 5.820231579541e-14, 5.766105220086e-13, 1.186495793471e-12, -1.266734493280e-11],
    [0.0, 1.765194089338e-12, 1.944339743818e-12, -3.601794386996e-14, 4.396602872143e-13, 6.432696729600e-12, 4.615806713055e-11, -4.258722866437e-10],
    [0.0, 9.04483676345625e-12, -1.29816917658823e-11, 4.082150659615e-13, -1.24330365320172e-11, -1.39571683725792e-10, -5.54336148667141e-10, 9.45486578503261e-09],
    [0.0, 4.98930345609785e-10, 3.49977768819641e-10, -4.289542980767e-12, 6.71083474044549e-11, 5.95451479522191e-10, 3.48789978951367e-10, -5.86635622821309e-08],
    [0.0, -2.11964170928181e-08, -8.67270669346398e-09, 5.086829642731e-11, 2.43865205376067e-10, 2.42471442836205e-09, -2.79188977451042e-09, -1.28835028104639e-06],
    [0.0, 3.98295476005614e-07, 1.31381116840118e-07, -6.35435561050807e-10, 1.67559587099969e-08, 2.47485710143120e-07, 2.09563208958551e-06, 4.41413815691885e-05],
    [0.0, -5.49390160829409e-06, -1.36790720600822e-06, 6.82309323251123e-09, -9.32738632357572e-07, -1.14710398652091e-05, -6.76512715080324e-05, -7.61738385590776e-04],
    [0.0, 7.74065155353262e-05, 1.19210697673160e-05, -5.63374555753167e-08, 2.39030487004977e-05, 2.71252453754519e-04, 1.32129867629062e-03, 9.66090902985550e-03],
    [0.0, -1.48201933009105e-03, -1.42181943986587e-04, 3.57005361100431e-07, -4.68648206591515e-04, -4.96812745851408e-03, -2.05062147771513e-02, -1.01410568057649e-01],
    [0.0, 4.97836392625268e-02, 4.12615396191829e-03, -2.40050045173721e-06, 8.34977776583956e-03, 8.26020602026780e-02, 2.88068671894324e-01, 9.54714798156712e-01],
]

ORDER4_UPTO25 = [
    [0.0, 7.29841848989391e-04, 2.36392855180768e-04, 2.33766206773151e-07, -4.45711399441838e-05, 0.0, 0.0, -6.00691586407385e-04],
    [0.0, -3.53899555749875e-02, -9.16785337967013e-03, -3.81542906607063e-05, 1.27267770241379e-03, -7.85617372254488e-02, -2.37900485051067e-01, -3.64479545338439e-01],
    [0.0, 2.07797425718513e+00, 4.62186525041313e-01, 3.51416601267000e-03, -2.36954961381262e-01, 6.35653573484868e+00, 1.84122184400896e+01, 1.57496131755179e+01],
    [0.0, -1.00464709786287e+02, -1.96943786006540e+01, -1.66538571864728e-01, 1.54330657903756e+01, -3.38296938763990e+02, -1.00200731304146e+03, -6.54944248734901e+02],
    [0.0, 3.15206108877819e+03, 4.99169195295559e+02, 4.80006136831847e+00, -5.22799159267808e+02, 1.25120495802096e+04, 3.75151841595736e+04, 1.70830039597097e+04],
    [0.0, -6.27054715090012e+04, -6.21419845845090e+03, -8.73165934223603e+01, 1.05951216669313e+04, -3.16847570511637e+05, -9.50626663390130e+05, -2.90517939780207e+05],
]

ORDER4_UPTO25_INV = [
    [0.0, 0.0, 5.21445053212414e+07, 0.0, 0.0, -1.02427466127427e+09, -2.88139014651985e+09, 0.0],
    [1.9623264149430e-01, 1.54721246264919e+07, -1.34113464389309e+07, 0.0, -2.51177235556236e+06, 3.70104713293016e+08, 1.06625915044526e+09, 3.49059698304732e+07],
    [-4.9695241464490e-01, -5.26074391316381e+06, 1.13673298305631e+06, 1.66000945117640e+04, 8.72975373557709e+05, -5.87119005093822e+07, -1.72465289687396e+08, -1.64944522586065e+07],
    [-6.0156581186481e-05, 7.67135400969617e+05, -2.81501182042707e+03, -6.14479071209961e+03, -1.29194382386499e+05, 5.38614211391604e+06, 1.60419390230055e+07, 2.96817940164703e+06],
]

ORDER4_UPTO35 = [
    [0.0, 7.29841848989391e-04, 2.36392855180768e-04, 5.74245945342286e-06, -4.45711399441838e-05, 0.0, 0.0, -6.00691586407385e-04],
    [0.0, -3.53899555749875e-02, -9.16785337967013e-03, -7.58735928102351e-05, 1.27267770241379e-03, -7.85617372254488e-02, -2.37900485051067e-01, -3.64479545338439e-01],
    [0.0, 2.07797425718513e+00, 4.62186525041313e-01, 2.35072857922892e-04, -2.36954961381262e-01, 6.35653573484868e+00, 1.84122184400896e+01, 1.57496131755179e+01],
    [0.0, -1.00464709786287e+02, -1.96943786006540e+01, -3.78812134013125e-03, 1.54330657903756e+01, -3.38296938763990e+02, -1.00200731304146e+03, -6.54944248734901e+02],
    [0.0, 3.15206108877819e+03, 4.99169195295559e+02, 3.09871652785805e-01, -5.22799159267808e+02, 1.25120495802096e+04, 3.75151841595736e+04, 1.70830039597097e+04],
    [0.0, -6.27054715090012e+04, -6.21419845845090e+03, -7.11108633061306e+00, 1.05951216669313e+04, -3.16847570511637e+05, -9.50626663390130e+05, -2.90517939780207e+05],
]

ORDER4_UPTO35_INV = [
    [0.0, 0.0, 5.21445053212414e+07, 0.0, 0.0, -1.02427466127427e+09, -2.88139014651985e+09, 0.0],
    [1.9623264149430e-01, 1.54721246264919e+07, -1.34113464389309e+07, 0.0, -2.51177235556236e+06, 3.70104713293016e+08, 1.06625915044526e+09, 3.49059698304732e+07],
    [-4.9695241464490e-01, -5.26074391316381e+06, 1.13673298305631e+06, 0.0, 8.72975373557709e+05, -5.87119005093822e+07, -1.72465289687396e+08, -1.64944522586065e+07],
    [-6.0156581186481e-05, 7.67135400969617e+05, -2.81501182042707e+03, 0.0, -1.29194382386499e+05, 5.38614211391604e+06, 1.60419390230055e+07, 2.96817940164703e+06],
]

ORDER5_UPTO1 = [
    [-4.46679165328413e-11, 1.93117331714174e-10, 0.0, 0.0, 0.0, -2.03822632771791e-09, 0.0, 0.0],
    [1.21879111988031e-09, -4.57267589660699e-09, 4.84989776180094e-09, 0.0, -8.92432153868554e-09, 3.89110229133810e-08, 0.0, 0.0],
    [-2.62975022612104e-08, 2.48339908218932e-08, 1.31538893944284e-07, -2.48581772214623e-07, 1.77288899268988e-08, -5.84914787904823e-07, 0.0, 0.0],
    [5.15106194905897e-07, 1.50716729438474e-06, -2.766753852879e-06, -4.34482635782585e-06, 3.040754680666e-06, 8.30316168666696e-06, 0.0, 0.0],
    [-9.27933625824749e-06, -6.07268757707381e-05, -7.651163510626e-05, -7.46018257987630e-07, 1.058229325071e-04, -1.13218402310546e-04, 0.0, 0.0],
    [1.51794097682482e-04, 1.37506939145643e-03, 4.033058545972e-03, 1.01210776517279e-02, 4.596379534985e-02, 1.49128888586790e-03, 0.0, 0.0],
    [-2.15865967920301e-03, -2.20258754419939e-02, -8.16520022916145e-02, -2.83193369640005e-01, -1.75382723579114e+00, -1.96867576904816e-02, 0.0, 0.0],
    [2.26659266316985e-02, 2.31271692140905e-01, 8.57346024118779e-01, 2.97353038120345e+00, 1.84151859759049e+01, 2.95524224714749e-01, 0.0, 0.0],
]

ORDER5_UPTO1_W = [
    [0.0, 0.0, 0.0, 4.09594812521430e-09],
    [0.0, -9.41953204205665e-09, -3.84961617022042e-08, -6.47097874264417e-08],
    [8.62848118397570e-09, 1.47452251067755e-07, 5.66595396544470e-07, 6.743541482689e-07],
    [-1.38975551148989e-07, -1.57456991199322e-06, -5.52351805403748e-06, -5.917993920224e-06],
    [1.602894068228e-06, 1.45098401798393e-05, 4.53160377546073e-05, 4.531969237381e-05],
    [-1.646364300836e-05, -1.18858834181513e-04, -3.22542784865557e-04, -2.99102856679638e-04],
    [1.538445806778e-04, 8.53697675984210e-04, 1.95682017370967e-03, 1.65695765202643e-03],
    [-1.28848868034502e-03, -5.22877807397165e-03, -9.77232537679229e-03, -7.40671222520653e-03],
    [9.38866933338584e-03, 2.60854524809786e-02, 3.79455945268632e-02, 2.50889946832192e-02],
    [-5.61737590178812e-02, -9.71152726809059e-02, -1.02979262192227e-01, -5.73782817487958e-02],
    [2.69266719309991e-01, 2.19086362515979e-01, 1.49451349150573e-01, 6.66713443086877e-02],
]

ORDER5_UPTO5 = [
    [0.0, 1.04525287289788e-14, -6.89693150857911e-14, 0.0, 7.12332088345321e-13, 1.04348658616398e-13, 0.0, 0.0],
    [-2.58163897135138e-14, 5.44611782010773e-14, 5.92064260918861e-13, -3.61293809667763e-12, 3.16578501501894e-12, -1.94147461891055e-12, 0.0, 0.0],
    [8.14127461488273e-13, -4.831059411392e-12, 1.847170956043e-11, -2.70803518291085e-11, -8.776668218053e-11, 3.485512360993e-11, 0.0, 0.0],
    [-2.11414838976129e-11, 1.136643908832e-10, -3.390752744265e-10, 8.83758848468769e-10, -2.342817613343e-09, -6.277497362235e-10, 0.0, 0.0],
    [5.09822003260014e-10, -1.104373076913e-09, -2.995532064116e-09, 1.59166632851267e-08, -3.496962018025e-08, 1.100758247388e-08, 0.0, 0.0],
    [-1.16002134438663e-08, -2.35346740649916e-08, 1.57456141058535e-07, -1.32581997983422e-07, -3.03172870136802e-07, -1.88329804969573e-07, 0.0, 0.0],
    [2.46810694414540e-07, 1.43772622028764e-06, -3.95859409711346e-07, -7.60223407443995e-06, 1.50511293969805e-06, 3.12338120839468e-06, 0.0, 0.0],
    [-4.92556826124502e-06, -4.23405023015273e-05, -9.58924580919747e-05, -7.41019244900952e-05, 1.37704919387696e-04, -5.04404167403568e-05, 0.0, 0.0],
    [9.02580687971053e-05, 9.12034574793379e-04, 3.23551502557785e-03, 9.81432631743423e-03, 4.70723869619745e-02, 8.00338056610995e-04, 0.0, 0.0],
    [-1.45190025120726e-03, -1.52479441718739e-02, -5.97587007636479e-02, -2.23055570487771e-01, -1.47486623003693e+00, -1.30892406559521e-02, 0.0, 0.0],
    [1.73416786387475e-02, 1.76055265928744e-01, 6.46432853383057e-01, 2.21460798080643e+00, 1.35704792175847e+01, 2.47383140241103e-01, 0.0, 0.0],
]

ORDER5_UPTO5_W = [
    [0.0, 0.0, 0.0, -8.16770412525963e-16],
    [0.0, 0.0, 1.04072340345039e-14, 1.31376515047977e-14],
    [0.0, -3.42790561802876e-14, -1.60808044529211e-13, -1.856950818865e-13],
    [3.23496149760478e-14, 5.26475736681542e-13, 2.183534866798e-12, 2.596836515749e-12],
    [-5.24314473469311e-13, -7.184330797139e-12, -2.939403008391e-11, -3.372639523006e-11],
    [7.743219385056e-12, 9.763932908544e-11, 3.679254029085e-10, 4.025371849467e-10],
    [-1.146022750992e-10, -1.244014559219e-09, -4.23775673047899e-09, -4.389453269417e-09],
    [1.615238462197e-09, 1.472744068942e-08, 4.46559231067006e-08, 4.332753856271e-08],
    [-2.15479017572233e-08, -1.611749975234e-07, -4.26488836563267e-07, -3.82673275931962e-07],
    [2.70933462557631e-07, 1.616487851917e-06, 3.64721335274973e-06, 2.98006900751543e-06],
    [-3.18750295288531e-06, -1.46852359124154e-05, -2.74868382777722e-05, -2.00718990300052e-05],
    [3.47425221210099e-05, 1.18900349101069e-04, 1.78586118867488e-04, 1.13876001386361e-04],
    [-3.45558237388223e-04, -8.37562373221756e-04, -9.68428981886534e-04, -5.23627942443563e-04],
    [3.05779768191621e-03, 4.93752683045845e-03, 4.16002324339929e-03, 1.83524565118203e-03],
    [-2.29118251223003e-02, -2.25514728915673e-02, -1.28290192663141e-02, -4.37785737450783e-03],
    [1.59834227924213e-01, 6.95211812453929e-02, 2.22353727685016e-02, 5.36963805223095e-03],
]

ORDER5_UPTO10 = [
    [0.0, 0.0, 0.0, -1.27815158195209e-14, -1.19442341030461e-13, 0.0, 0.0, 0.0],
    [0.0, -3.67160504428358e-15, 1.39017367502123e-14, 1.99910415869821e-14, -2.34074833275956e-12, 7.95526040108997e-15, 0.0, 0.0],
    [-1.13825201010775e-14, 1.27876280158297e-14, -6.96391385426890e-13, 3.753542914426e-12, 6.861649627426e-12, -2.48593096128045e-13, 0.0, 0.0],
    [1.89737681670375e-13, -1.296476623788e-12, 1.176946020731e-12, -2.708018219579e-11, 6.082671496226e-10, 4.761246208720e-12, 0.0, 0.0],
    [-4.81561201185876e-12, 1.477175434354e-11, 1.725627235645e-10, -1.190574776587e-09, 5.381160105420e-09, -9.535763686605e-11, 0.0, 0.0],
    [1.56666512163407e-10, 5.464102147892e-10, -3.686383856300e-09, 1.106696436509e-08, -6.253297138700e-08, 2.225273630974e-09, 0.0, 0.0],
    [-3.73782213255083e-09, -2.42538340602723e-08, 2.87495324207095e-08, 3.954955671326e-07, -2.135966835050e-06, -4.49796778054865e-08, 0.0, 0.0],
    [9.15858355075147e-08, 8.20460740637617e-07, 1.71307311000282e-06, -4.398596059588e-06, -2.373394341886e-05, 9.17812870287386e-07, 0.0, 0.0],
    [-2.13775073585629e-06, -2.20379304598661e-05, -7.94273603184629e-05, -2.01087998907735e-04, 2.88711171412814e-06, -1.86764236490502e-05, 0.0, 0.0],
    [4.56547356365536e-05, 4.90295372978785e-04, 2.00938064965897e-03, 7.89092425542937e-03, 4.85221195290753e-02, 3.76807779068053e-04, 0.0, 0.0],
    [-8.68003909323740e-04, -9.14294111576119e-03, -3.63329491677178e-02, -1.42056749162695e-01, -1.04346091985269e+00, -8.10456360143408e-03, 0.0, 0.0],
    [1.22703754069176e-02, 1.22590403403690e-01, 4.34393683888443e-01, 1.39964149420683e+00, 7.89901551676692e+00, 2.01097936411496e-01, 0.0, 0.0],
]

ORDER5_UPTO10_W = [
    [0.0, 0.0, 0.0, 7.28996979748849e-19],
    [0.0, 0.0, -1.08764612488790e-17, -1.26518146195173e-17],
    [0.0, 0.0, 1.85299909689937e-16, 1.886145834486e-16],
    [0.0, -8.20929494859896e-16, -2.730195628655e-15, -2.876728287383e-15],
    [1.25678686624734e-15, 1.37356038393016e-14, 4.127368817265e-14, 4.114588668138e-14],
    [-2.34266248891173e-14, -2.022863065220e-13, -5.881379088074e-13, -5.44436631413933e-13],
    [3.973252415832e-13, 3.058055403795e-12, 7.805245193391e-12, 6.64976446790959e-12],
    [-6.830539401049e-12, -4.387890955243e-11, -9.632707991704e-11, -7.44560069974940e-11],
    [1.140771033372e-10, 5.923946274445e-10, 1.099047050624e-09, 7.57553198166848e-10],
    [-1.82546185762009e-09, -7.503659964159e-09, -1.15042731790748e-08, -6.92956101109829e-09],
    [2.77209637550134e-08, 8.851599803902e-08, 1.09415155268932e-07, 5.62222859033624e-08],
    [-4.01726946190383e-07, -9.65561998415038e-07, -9.33687124875935e-07, -3.97500114084351e-07],
    [5.48227244014763e-06, 9.60884622778092e-06, 7.02338477986218e-06, 2.39039126138140e-06],
    [-6.95676245982121e-05, -8.56551787594404e-05, -4.53759748787756e-05, -1.18023950002105e-05],
    [8.05193921815776e-04, 6.66057194311179e-04, 2.41722511389146e-04, 4.52254031046244e-05],
    [-8.15528438784469e-03, -4.17753183902198e-03, -9.75935943447037e-04, -1.21113782150370e-04],
    [9.71769901268114e-02, 2.25443826852447e-02, 2.57520532789644e-03, 1.75013126731224e-04],
]

ORDER5_UPTO15 = [
    [0.0, 0.0, 0.0, 0.0, -2.24366166957225e-14, 0.0, 0.0, 3.60020423754545e-16],
    [-4.16387977337393e-17, -4.56279214732217e-16, -2.52879337929239e-15, -6.42391438038888e-15, 4.87224967526081e-14, 0.0, -1.05490525395105e-15, -6.24245825017148e-15],
    [7.20872997373860e-16, 6.24941647247927e-15, 2.13925810087833e-14, 5.37848223438815e-15, 5.587369053655e-12, 8.98007931950169e-15, 1.96855386549388e-14, 9.945311467434e-14],
    [1.395993802064e-14, 1.737896339191e-13, 7.884307667104e-13, 8.960828117859e-13, -3.045253104617e-12, 7.25673623859497e-14, -5.500330153548e-13, -1.749051512721e-12],
    [3.660484641252e-14, 8.964205979517e-14, -9.023398159510e-13, 5.214153461337e-11, -1.223983883080e-09, 5.851494250405e-14, 1.003849567976e-11, 2.768503957853e-11],
    [-4.154857548139e-12, -3.538906780633e-11, -5.814101544957e-11, -1.106601744067e-10, -2.05603889396319e-09, -4.234204823846e-11, -1.720997242621e-10, -4.08688551136506e-10],
    [2.301379846544e-11, 9.561341254948e-11, -1.333480437968e-09, -2.007890743962e-08, 2.58604071603561e-07, 3.911507312679e-10, 3.533277061402e-09, 6.04189063303610e-09],
    [-1.033307012866e-09, -9.772831891310e-09, -2.217064940373e-08, 1.543764346501e-07, 1.34240904266268e-06, -9.65094802088511e-09, -6.389171736029e-08, -8.23540111024147e-08],
    [3.997777641049e-08, 4.240340194620e-07, 1.643290788086e-06, 4.520749076914e-06, -5.72877569731162e-05, 3.42197444235714e-07, 1.046236652393e-06, 1.01503783870262e-06],
    [-9.35118186333939e-07, -1.02384302866534e-05, -4.39602147345028e-05, -1.88893338587047e-04, -9.56275105032191e-04, -7.51821178144509e-06, -1.73148206795827e-05, -1.20490761741576e-05],
    [2.38589932752937e-05, 2.57987709704822e-04, 1.08648982748911e-03, 4.73264487389288e-03, 4.23367010370921e-02, 1.94218051498662e-04, 2.57820531617185e-04, 1.26928442448148e-04],
    [-5.35185183652937e-04, -5.54735977651677e-03, -2.13014521653498e-02, -7.91197893350253e-02, -5.76800927133412e-01, -5.38533819142287e-03, -3.46188265338350e-03, -1.05539461930597e-03],
    [8.85218988709735e-03, 8.68245143991948e-02, 2.94150684465425e-01, 8.60057928514554e-01, 3.87328263873381e+00, 1.68122596736809e-01, 7.03302497508176e-02, 1.15543698537013e-02],
]

ORDER5_UPTO15_W = [
    [0.0, -1.29043630202811e-19, 0.0, 0.0],
    [2.51163533058925e-18, 2.16234952241296e-18, 0.0, 0.0],
    [-4.31723745510697e-17, -3.107631557965e-17, 0.0, 0.0],
    [6.557620865832e-16, 4.570804313173e-16, 0.0, 0.0],
    [-1.016528519495e-14, -6.301348858104e-15, 0.0, 0.0],
    [1.491302084832e-13, 8.031304476153e-14, 0.0, 0.0],
    [-2.06638666222265e-12, -9.446196472547e-13, 0.0, 0.0],
    [2.67958697789258e-11, 1.018245804339e-11, 0.0, 0.0],
    [-3.23322654638336e-10, -9.96995451348129e-11, 0.0, 0.0],
    [3.63722952167779e-09, 8.77489010276305e-10, 0.0, 0.0],
    [-3.75484943783021e-08, -6.84655877575364e-09, 0.0, 0.0],
    [3.49164261987184e-07, 4.64460857084983e-08, 0.0, 0.0],
    [-2.92658670674908e-06, -2.66924538268397e-07, 0.0, 0.0],
    [2.12937256719543e-05, 1.24621276265907e-06, 0.0, 0.0],
    [-1.19434130620929e-04, -4.30868944351523e-06, 0.0, 0.0],
    [6.45524336158384e-04, 9.94307982432868e-06, 0.0, 0.0],
]

ORDER5_UPTO20 = [
    [0.0, 0.0, 0.0, -2.92397030777912e-15, 1.17976126840060e-14, 0.0, 0.0, 0.0],
    [1.91875764545740e-16, 2.02778478673555e-15, 7.79850771456444e-15, 1.94152129078465e-14, 1.24156229350669e-13, 1.74841995087592e-15, -1.11199320525573e-15, -9.49816486853687e-16],
    [7.8357401095707e-16, 1.01640716785099e-14, 6.00464406395001e-14, 4.859447665850e-13, -3.892741622280e-12, -6.95671892641256e-16, 1.85007587796671e-15, 6.67922080354234e-15],
    [-3.260875931644e-14, -3.385363492036e-13, -1.249779730869e-12, -3.217227223463e-12, -7.755793199043e-12, -3.000659497257e-13, 1.220613939709e-13, 2.606163540537e-15],
    [-1.186752035569e-13, -1.615655871159e-12, -1.020720636353e-11, -7.484522135512e-11, 9.492190032313e-10, 2.021279817961e-13, 1.275068098526e-12, 1.983799950150e-12],
    [4.275180095653e-12, 4.527419140333e-11, 1.814709816693e-10, 7.19101516047753e-10, -4.98680128123353e-09, 3.853596935400e-11, -5.341838883262e-11, -5.400548574357e-11],
    [3.357056136731e-11, 3.853670706486e-10, 1.766397336977e-09, 6.88409355245582e-09, -1.81502268782664e-07, 1.461418533652e-10, 6.161037256669e-10, 6.638043374114e-10],
    [-1.123776903884e-09, -1.184607130107e-08, -4.603559449010e-08, -1.44374545515769e-07, 2.69463269394888e-06, -1.014517563435e-08, -1.009147879750e-08, -8.799518866802e-09],
    [1.231203269887e-08, 1.347873288827e-07, 5.863956443581e-07, 2.74941013315834e-06, 2.50032154421640e-05, 1.132736008979e-07, 2.907862965346e-07, 1.791418482685e-07],
    [-3.99851421361031e-07, -4.47788241748377e-06, -2.03797212506691e-05, -1.02790452049013e-04, -1.33684303917681e-03, -2.86605475073259e-06, -6.12300038720919e-06, -2.96075397351101e-06],
    [1.45418822817771e-05, 1.54942754358273e-04, 6.31405161185185e-04, 2.59924221372643e-03, 2.29121951862538e-02, 1.21958354908768e-04, 1.00104454489518e-04, 3.38028206156144e-05],
    [-3.49912254976317e-04, -3.55524254280266e-03, -1.30102750145071e-02, -4.35712368303551e-02, -2.45653725061323e-01, -3.86293751153466e-03, -1.80677298502757e-03, -3.58426847857878e-04],
    [6.67768703938812e-03, 6.44912219301603e-02, 2.10244289044705e-01, 5.62170709585029e-01, 1.89999883453047e+00, 1.45298342081522e-01, 5.78009914536630e-02, 8.39213709428516e-03],
]

ORDER5_UPTO20_W = [
    [0.0, 2.69412277020887e-20, 0.0, 0.0],
    [0.0, -4.24837886165685e-19, 0.0, 0.0],
    [1.33829971060180e-17, 6.030500065438e-18, 0.0, 0.0],
    [-3.44841877844140e-16, -9.069722758289e-17, 0.0, 0.0],
    [4.745009557656e-15, 1.246599177672e-15, 0.0, 0.0],
    [-6.033814209875e-14, -1.56872999797549e-14, 0.0, 0.0],
    [1.049256040808e-12, 1.87305099552692e-13, 0.0, 0.0],
    [-1.70859789556117e-11, -2.09498886675861e-12, 0.0, 0.0],
    [2.15219425727959e-10, 2.11630022068394e-11, 0.0, 0.0],
    [-2.52746574206884e-09, -1.92566242323525e-10, 0.0, 0.0],
    [3.27761714422960e-08, 1.62012436344069e-09, 0.0, 0.0],
    [-3.90387662925193e-07, -1.23621614171556e-08, 0.0, 0.0],
    [3.46340204593870e-06, 7.72165684563049e-08, 0.0, 0.0],
    [-2.43236345136782e-05, -3.59858901591047e-07, 0.0, 0.0],
    [3.54846978585226e-04, 2.43682618601000e-06, 0.0, 0.0],
]

ORDER5_UPTO25 = [
    [0.0, 2.89872355524581e-16, 1.97068646590923e-15, 1.33642069941389e-14, -6.07053986130526e-14, 0.0, 0.0, 0.0],
    [-1.13927848238726e-15, -1.22296292045864e-14, -4.89419270626800e-14, -1.55850612605745e-13, 1.04447493138843e-12, -9.10338640266542e-15, 5.52380927618760e-15, 3.99457454087556e-15],
    [7.39404133595713e-15, 6.184065097200e-14, 1.136466605916e-13, -7.522712577474e-13, -4.286617818951e-13, 1.00438927627833e-13, -6.43424400204124e-14, -5.11826702824182e-14],
    [1.445982921243e-13, 1.649846591230e-12, 7.546203883874e-12, 3.209520801187e-11, -2.632066100073e-10, 7.817349237071e-13, -2.358734508092e-13, -4.157593182747e-14],
    [-2.676703245252e-12, -2.729713905266e-11, -9.635646767455e-11, -2.075594313618e-10, 4.804518986559e-09, -2.547619474232e-11, 8.261326648131e-12, 4.214670817758e-12],
    [5.823521627177e-12, 3.709913790650e-11, -8.295965491209e-11, -2.070575894402e-09, -1.835675889421e-08, 1.479321506529e-10, 9.229645304956e-11, 6.705582751532e-11],
    [2.17264723874381e-10, 2.216486288382e-09, 7.534109114453e-09, 7.323046997451e-09, -1.068175391334e-06, 1.52314028857627e-09, -5.68108973828949e-09, -3.36086411698418e-09],
    [3.56242145897468e-09, 4.616160236414e-08, 2.699970652707e-07, 1.851491550417e-06, 3.292234974141e-05, 9.20072040917242e-09, 1.22477891136278e-07, 6.07453633298986e-08],
    [-3.03763737404491e-07, -3.32380270861364e-06, -1.42982334217081e-05, -6.37524802411383e-05, -5.94805357558251e-04, -2.19427111221848e-06, -2.11919643127927e-06, -7.40736211041247e-07],
    [9.46859114120901e-06, 9.84635072633776e-05, 3.78290946669264e-04, 1.36795464918785e-03, 8.29382168612791e-03, 8.65797782880311e-05, 4.23605032368922e-05, 8.84176371665149e-06],
    [-2.30896753853196e-04, -2.30092118015697e-03, -8.03133015084373e-03, -2.42051126993146e-02, -9.93122509049447e-02, -2.82718629312875e-03, -1.14423444576221e-03, -1.72559275066834e-04],
    [5.24663913001114e-03, 5.00845183695073e-02, 1.58689469640791e-01, 3.97847167557815e-01, 1.09857804755042e+00, 1.28718310443295e-01, 5.06607252890186e-02, 7.16639814253567e-03],
]

ORDER5_UPTO25_W = [
    [0.0, -5.63938733073804e-21, 0.0, 0.0],
    [-2.14649508112234e-18, 6.92182516324628e-20, 0.0, 0.0],
    [-2.45525846412281e-18, -1.586937691507e-18, 0.0, 0.0],
    [6.126212599772e-16, 3.357639744582e-17, 0.0, 0.0],
    [-8.526651626939e-15, -4.810285046442e-16, 0.0, 0.0],
    [4.826636065733e-14, 5.386312669975e-15, 0.0, 0.0],
    [-3.39554163649740e-13, -6.117895297439e-14, 0.0, 0.0],
    [1.67070784862985e-11, 8.441808227634e-13, 0.0, 0.0],
    [-4.42671979311163e-10, -1.18527596836592e-11, 0.0, 0.0],
    [6.77368055908400e-09, 1.36296870441445e-10, 0.0, 0.0],
    [-7.03520999708859e-08, -1.17842611094141e-09, 0.0, 0.0],
    [6.04993294708874e-07, 7.80430641995926e-09, 0.0, 0.0],
    [-7.80555094280483e-06, -5.97767417400540e-08, 0.0, 0.0],
    [2.85954806605017e-04, 1.65186146094969e-06, 0.0, 0.0],
]

ORDER5_UPTO40 = [
    [-1.73363958895356e-06, -1.60102542621710e-05, -4.48880032128422e-05, -6.38526371092582e-05, -3.59049364231569e-05, 0.0, 2.77778345870650e-05, 1.83574464457207e-05],
    [1.19921331441483e-04, 1.10331262112395e-03, 2.69025112122177e-03, -2.29263585792626e-03, -2.25963977930044e-02, 0.0, -2.22835017655890e-03, -1.54837969489927e-03],
    [-1.59437614121125e-02, -1.50043662589017e-01, -4.01048115525954e-01, -7.65735935499627e-02, 1.12594870794668e+00, 0.0, 1.61077633475573e-01, 1.18520453711586e-01],
    [1.13467897349442e+00, 1.05563640866077e+01, 2.78360021977405e+01, 9.12692349152792e+00, -4.56752462103909e+01, 0.0, -8.96743743396132e+00, -6.69649981309161e+00],
    [-4.47216460864586e+01, -4.10468817024806e+02, -1.04891729356965e+03, -2.32077034386717e+02, 1.05804526830637e+03, 0.0, 3.28062687293374e+02, 2.44789386487321e+02],
    [1.06251216612604e+03, 9.62604416506819e+03, 2.36985942687423e+04, 2.81839578728845e+02, -1.16003199605875e+04, 0.0, -7.65722701219557e+03, -5.68832664556359e+03],
    [-1.52073917378512e+04, -1.35888069838270e+05, -3.19504627257548e+05, 9.59529683876419e+04, -4.07297627297272e+04, 0.0, 1.10255055017664e+05, 8.14507604229357e+04],
    [1.20662887111273e+05, 1.06107577038340e+06, 2.34879693563358e+06, -1.77638956809518e+06, 2.22215528319857e+06, 0.0, -8.92528122219324e+05, -6.55181056671474e+05],
    [-4.07186366852475e+05, -3.51190792816119e+06, -7.16341568174085e+06, 1.02489759645410e+07, -1.61196455032613e+07, 0.0, 3.10638627744347e+06, 2.26410896607237e+06],
]

ORDER5_UPTO40_W = [
    [-2.40799435809950e-08, -4.61100906133970e-10, 0.0, 0.0],
    [8.12621667601546e-06, 1.43069932644286e-07, 0.0, 0.0],
    [-9.04491430884113e-04, -1.63960915431080e-05, 0.0, 0.0],
    [6.37686375770059e-02, 1.15791154612838e-03, 0.0, 0.0],
    [-2.96135703135647e+00, -5.30573476742071e-02, 0.0, 0.0],
    [9.15142356996330e+01, 1.61156533367153e+00, 0.0, 0.0],
    [-1.86971865249111e+03, -3.23248143316007e+01, 0.0, 0.0],
    [2.42945528916947e+04, 4.12007318109157e+02, 0.0, 0.0],
    [-1.81852473229081e+05, -3.02260070158372e+03, 0.0, 0.0],
    [5.96854758661427e+05, 9.71575094154768e+03, 0.0, 0.0],
]

ORDER5_UPTO59 = [
    [-2.43758528330205e-02, -2.28861955413636e-01, -6.95053039285586e-01, -1.58072809087018e+00, -3.33963830405396e+00, 0.0, 0.0, 0.0],
    [2.07301567989771e+00, 1.93190784733691e+01, 5.76874090316016e+01, 1.27050801091948e+02, 2.51830424600204e+02, 0.0, 0.0, 0.0],
    [-6.45964225381113e+01, -5.99774730340912e+02, -1.77704143225520e+03, -3.86687350914280e+03, -7.57728527654961e+03, 0.0, 0.0, 0.0],
    [7.14160088655470e+02, 6.61844165304871e+03, 1.95366082947811e+04, 4.23024828121420e+04, 8.21966816595690e+04, 0.0, 0.0, 0.0],
]

ORDER5_UPTO59_W = [
    [2.09539509123135e-05, 1.34547929260279e-05, 1.23464092261605e-06, 1.35482430510942e-08],
    [-6.87646614786982e-04, -4.19389884772726e-04, -3.55224564275590e-05, -3.27722199212781e-07],
    [6.68743788585688e-03, 3.87706687610809e-03, 3.03274662192286e-04, 2.41522703684296e-06],
]


# F_0(x) = sqrt(pi / 4x) + exp(-x) p(1/x) for 5 < x <= 10, 10 < x <= 15 and 15 < x <= 33
F0_TAIL_10 = [
    4.6897511375022e-01, -6.9955602298985e-01, 5.3689283271887e-01, -3.2883030418398e-01,
    2.4645596956002e-01, -4.9984072848436e-01, -3.1501078774085e-06,
]
F0_TAIL_15 = [-1.8784686463512e-01, 2.2991849164985e-01, -4.9893752514047e-01, -2.1916512131607e-05]
F0_TAIL_33 = [1.9623264149430e-01, -4.9695241464490e-01, -6.0156581186481e-05]

########################################################################################################################
##    segment description
########################################################################################################################

# polynomial in y = x - center
Fit = collections.namedtuple("Fit", ["coeffs"])

# (p(x) + q(1/x)) exp(-x) x^power, added to the large-x asymptote of the root or weight
ExpFit = collections.namedtuple("ExpFit", ["pos", "inv", "power"])

# the first weight as F_0 + shift exp(-x) minus the sum of the other weights
Remainder = collections.namedtuple("Remainder", ["shift"])

# the moments F_0, ..., F_index, kind is one of
#   "top":  coeffs give F_index(y), lower moments by downward recurrence
#   "tail": F_0 = sqrt(pi / 4x) + exp(-x) coeffs(1/x), higher moments by upward recurrence
#   "bare": F_0 = sqrt(pi / 4x)
Moments = collections.namedtuple("Moments", ["kind", "coeffs", "index"])

# roots=None: u = F_1 / (F_0 - F_1) (order 1 only)
# weights=None: weights from the moments F_0, ..., F_(n-1) and the roots
Segment = collections.namedtuple("Segment", ["upper", "center", "moments", "roots", "weights"])


def _col(table, i, extra=()):
    return [row[i] for row in table] + list(extra)


def _fits(table, cols):
    return [Fit(_col(table, i)) for i in cols]


def _exp_fits(table, inv_table, cols, times_x=True):
    extra = [0.0] if times_x else []
    return [ExpFit(_col(table, i, extra), _col(inv_table, i) if inv_table else [], 0) for i in cols]


_ORDER1 = [
    Segment(1, 0, Moments("top", _col(ORDER2_UPTO1, 2), 1), None, None),
    Segment(3, 2, Moments("top", _col(ORDER2_UPTO3, 2), 1), None, None),
    Segment(5, 4, Moments("top", _col(ORDER2_UPTO5, 2), 1), None, None),
    Segment(10, 0, Moments("tail", F0_TAIL_10, 1), None, None),
    Segment(15, 0, Moments("tail", F0_TAIL_15, 1), None, None),
    Segment(33, 0, Moments("tail", F0_TAIL_33, 1), None, None),
]

_ORDER2 = [
    Segment(1, 0, Moments("top", _col(ORDER2_UPTO1, 2), 1), _fits(ORDER2_UPTO1, [0, 1]), None),
    Segment(3, 2, Moments("top", _col(ORDER2_UPTO3, 2), 1), _fits(ORDER2_UPTO3, [0, 1]), None),
    Segment(5, 4, Moments("top", _col(ORDER2_UPTO5, 2), 1), _fits(ORDER2_UPTO5, [0, 1]), None),
    Segment(10, 7.5, Moments("tail", F0_TAIL_10, 1), _fits(ORDER2_UPTO10, [0, 1]), None),
    Segment(
        15, 0, Moments("tail", _col(ORDER2_UPTO15_INV, 2), 1), _exp_fits(ORDER2_UPTO15, ORDER2_UPTO15_INV, [0, 1]), None
    ),
    Segment(
        33, 0, Moments("tail", _col(ORDER2_UPTO33_INV, 2), 1), _exp_fits(ORDER2_UPTO33, ORDER2_UPTO33_INV, [0, 1]), None
    ),
    Segment(
        40,
        0,
        Moments("bare", None, 0),
        _exp_fits(ORDER2_UPTO40, None, [0, 1], times_x=False),
        [Remainder(0.0)] + _exp_fits(ORDER2_UPTO40, None, [2], times_x=False),
    ),
]

_ORDER3 = [
    Segment(1, 0, Moments("top", _col(ORDER3_UPTO1, 3), 2), _fits(ORDER3_UPTO1, [0, 1, 2]), None),
    Segment(3, 2, Moments("top", _col(ORDER3_UPTO3, 3), 2), _fits(ORDER3_UPTO3, [0, 1, 2]), None),
    Segment(5, 4, Moments("top", _col(ORDER3_UPTO5, 3), 2), _fits(ORDER3_UPTO5, [0, 1, 2]), None),
    Segment(10, 7.5, Moments("tail", F0_TAIL_10, 2), _fits(ORDER3_UPTO10, [0, 1, 2]), None),
    Segment(15, 12.5, Moments("tail", F0_TAIL_15, 2), _fits(ORDER3_UPTO15, [0, 1, 2]), None),
    Segment(
        20,
        0,
        Moments("tail", _col(ORDER3_UPTO20_INV, 3), 2),
        _exp_fits(ORDER3_UPTO20, ORDER3_UPTO20_INV, [0, 1, 2]),
        None,
    ),
    Segment(
        33,
        0,
        Moments("tail", F0_TAIL_33, 2),
        [
            ExpFit(_col(ORDER3_UPTO33, 0, [0.0]), [-6.60344754467191e02, 1.64931462413877e02], 0),
            ExpFit(_col(ORDER3_UPTO33, 1, [0.0]), [-6.30909125686731e03, 1.52231757709236e03], 0),
            ExpFit(_col(ORDER3_UPTO33, 2, [0.0]), [-1.45734701095912e04, 2.69831813951849e03], 0),
        ],
        None,
    ),
    Segment(
        47,
        0,
        Moments("bare", None, 0),
        _exp_fits(ORDER3_UPTO47, None, [0, 1, 2], times_x=False),
        [
            Remainder(0.0),
            ExpFit(_col(ORDER3_UPTO47, 3), [], 0),
            ExpFit([1.52258947224714e-01, -8.30661900042651e00, 1.92977367967984e02, -1.67787926005344e03], [], 0),
        ],
    ),
]


def _order4_direct(upper, center, table):
    return Segment(upper, center, None, _fits(table, [4, 5, 6, 7]), _fits(table, [0, 1, 2, 3]))


_ORDER4 = [
    _order4_direct(1, 0, ORDER4_UPTO1),
    _order4_direct(5, 3, ORDER4_UPTO5),
    _order4_direct(10, 7.5, ORDER4_UPTO10),
    Segment(
        15,
        12.5,
        Moments("tail", F0_TAIL_15, 0),
        _fits(ORDER4_UPTO15, [4, 5, 6, 7]),
        [Remainder(0.0)] + _fits(ORDER4_UPTO15, [1, 2, 3]),
    ),
    Segment(
        20,
        17.5,
        Moments("tail", F0_TAIL_33, 0),
        _fits(ORDER4_UPTO20, [4, 5, 6, 7]),
        [Remainder(0.0)] + _fits(ORDER4_UPTO20, [1, 2]) + [Fit(_col(ORDER4_UPTO20, 3, [4.94171300536397e-05]))],
    ),
    Segment(
        25,
        0,
        Moments("tail", _col(ORDER4_UPTO25_INV, 0), 0),
        _exp_fits(ORDER4_UPTO25, ORDER4_UPTO25_INV, [4, 5, 6, 7]),
        [Remainder(0.0)]
        + _exp_fits(ORDER4_UPTO25, ORDER4_UPTO25_INV, [1, 2])
        + [ExpFit(_col(ORDER4_UPTO25, 3, [9.77683627474638e02, 0.0]), _col(ORDER4_UPTO25_INV, 3), 0)],
    ),
    Segment(
        35,
        0,
        Moments("tail", _col(ORDER4_UPTO35_INV, 0), 0),
        _exp_fits(ORDER4_UPTO35, ORDER4_UPTO35_INV, [4, 5, 6, 7]),
        [Remainder(0.0)]
        + _exp_fits(ORDER4_UPTO35, ORDER4_UPTO35_INV, [1, 2])
        + [ExpFit(_col(ORDER4_UPTO35, 3, [5.55297573149528e01]), [], 0)],
    ),
    Segment(
        53,
        0,
        Moments("bare", None, 0),
        [
            ExpFit([-4.07557525914600e-05, -6.88846864931685e-04, 1.74725309199384e-02], [], 4),
            ExpFit([-3.62569791162153e-04, -9.09231717268466e-03, 1.84336760556262e-01], [], 4),
            ExpFit([-9.65842534508637e-04, -4.49822013469279e-02, 6.08784033347757e-01], [], 4),
            ExpFit([-2.19135070169653e-03, -1.19108256987623e-01, -7.50238795695573e-01], [], 4),
        ],
        [
            Remainder(0.0),
            ExpFit([6.16374517326469e-04, -1.26711744680092e-02, 8.14504890732155e-02], [], 4),
            ExpFit([2.08294969857230e-04, -3.77489954837361e-03, 2.09857151617436e-02], [], 4),
            ExpFit([5.76631982000990e-06, -7.89187283804890e-05, 3.28297971853126e-04], [], 4),
        ],
    ),
]


def _order5_low(upper, center, table, table_w):
    return Segment(
        upper, center, None, _fits(table, [0, 1, 2, 3, 4]), _fits(table, [5]) + _fits(table_w, [0, 1, 2, 3])
    )


def _order5_mid(upper, center, table, table_w):
    return Segment(
        upper, center, None, _fits(table, [0, 1, 2, 3, 4]), _fits(table, [5, 6, 7]) + _fits(table_w, [0, 1])
    )


_ORDER5 = [
    _order5_low(1, 0, ORDER5_UPTO1, ORDER5_UPTO1_W),
    _order5_low(5, 3, ORDER5_UPTO5, ORDER5_UPTO5_W),
    _order5_low(10, 7.5, ORDER5_UPTO10, ORDER5_UPTO10_W),
    _order5_mid(15, 12.5, ORDER5_UPTO15, ORDER5_UPTO15_W),
    _order5_mid(20, 17.5, ORDER5_UPTO20, ORDER5_UPTO20_W),
    _order5_mid(25, 22.5, ORDER5_UPTO25, ORDER5_UPTO25_W),
    Segment(
        40,
        0,
        Moments("bare", None, 0),
        _exp_fits(ORDER5_UPTO40, None, [0, 1, 2, 3, 4], times_x=False),
        [Remainder(-0.01962)]
        + _exp_fits(ORDER5_UPTO40, None, [6, 7], times_x=False)
        + _exp_fits(ORDER5_UPTO40_W, None, [0, 1], times_x=False),
    ),
    Segment(
        59,
        0,
        Moments("bare", None, 0),
        [ExpFit(_col(ORDER5_UPTO59, i), [], 3) for i in range(5)],
        [Remainder(0.0)] + [ExpFit(_col(ORDER5_UPTO59_W, i), [], 6) for i in range(4)],
    ),
]

# beyond the last segment of an order the large-x asymptote applies
SEGMENTS = {1: _ORDER1, 2: _ORDER2, 3: _ORDER3, 4: _ORDER4, 5: _ORDER5}
