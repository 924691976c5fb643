"""pre-calculated tables, generated by generate_py_tables.py"""

TABLE_VERSION = 2
MAX_ORDER = 32
POLYFIT_MIN_ORDER = 6
POLYFIT_MAX_ORDER = 14
POLYFIT_TERMS = 14

SMALLX_R0 = [
    [5.0000000000000000e-1],
    [1.3069360623708472e-1, 2.8693063937629153e+0],
    [6.0376924683279896e-2, 7.7682335593104605e-1, 6.6627997193856741e+0],
    [3.4819897306147152e-2, 3.8156718508004406e-1, 1.7373072694588976e+0, 11.846305648154911e+0],
    [2.2665926631698638e-2, 2.3127169214090556e-1, 8.5734602411883609e-1, 2.9735303812034607e+0, 18.415185975905099e+0],
    [1.5933294950708050e-2, 1.5647046776795464e-1, 5.2658326320347937e-1, 1.4554949383527417e+0, 4.4772915489042246e+0, 26.368226486820892e+0],
    [1.1813808454790222e-2, 1.1337832545962978e-1, 3.6143546199827142e-1, 8.9527303800610058e-1, 2.1671830744997034e+0, 6.2459217468839973e+0, 35.704994544697507e+0],
    [9.1096129361797586e-3, 8.6130778786234357e-2, 2.6546936423055724e-1, 6.1752374342048372e-1, 1.3290252120652056e+0, 2.9891077977621076e+0, 8.2783291650163166e+0, 46.425304325782915e+0],
    [7.2388268576176688e-3, 6.7744856280706221e-2, 2.0415049332589749e-1, 4.5633199434791133e-1, 9.1729173690437343e-1, 1.8243932992566772e+0, 3.9197868892557836e+0, 10.573996723107013e+0, 58.529065180664020e+0],
    [5.8908068184661304e-3, 5.4725924879562256e-2, 1.6232609261161096e-1, 3.5315267858751928e-1, 6.7944242243948439e-1, 1.2573939988964798e+0, 2.3797176188890109e+0, 4.9584689501831160e+0, 13.132652926121417e+0, 72.016228580573334e+0],
    [4.8873361261651270e-3, 4.5157008761019399e-2, 1.3240037096506917e-1, 2.8253618374640330e-1, 5.2746670115882439e-1, 9.3166748944873070e-1, 1.6361250128213277e+0, 2.9941113975093118e+0, 6.1047380665207360e+0, 15.954143802284949e+0, 86.886766630657463e+0],
    [4.1201918467690364e-3, 3.7911181291998903e-2, 1.1018828563899001e-1, 2.3179530831466224e-1, 4.2345630230694603e-1, 7.2421338523125791e-1, 1.2113317522159243e+0, 2.0525334008082455e+0, 3.6670630733185123e+0, 7.3583481234816474e+0, 19.038376627614218e+0, 103.14066236793083e+0],
    [3.5205547919345486e-3, 3.2289011702114359e-2, 9.3214971024566497e-2, 1.9395959218782608e-1, 3.4863942062035819e-1, 5.8246762196717318e-1, 9.4178878042410222e-1, 1.5174658097736393e+0, 2.5060512608340130e+0, 4.3982595654500426e+0, 8.7191456120517858e+0, 22.385292804867445e+0, 120.77790499430500e+0],
    [3.0429596866636516e-3, 2.7836958317494688e-2, 7.9934050123079714e-2, 1.6491083995350635e-1, 2.9275174955113165e-1, 4.8056334796006992e-1, 7.5805833071173866e-1, 1.1792349429563096e+0, 1.8494738526884430e+0, 2.9963211569901403e+0, 5.1875000243561148e+0, 10.187030609882370e+0, 25.994853806516270e+0, 139.79848737030667e+0],
    [2.6563882798588421e-3, 2.4250094342677908e-2, 6.9335687672495688e-2, 1.4207481953281493e-1, 2.4974878660205013e-1, 4.0442628385592421e-1, 6.2615572291363974e-1, 9.4929992942214439e-1, 1.4359478786754302e+0, 2.2069717422671000e+0, 3.5231083207720130e+0, 6.0346505430483566e+0, 11.761935734646895e+0, 29.867033445944998e+0, 160.20240462202360e+0],
    [2.3390891340939957e-3, 2.1317080945253202e-2, 6.0736095944339919e-2, 1.2376819871441241e-1, 2.1586001541338807e-1, 3.4579995866737608e-1, 5.2767337072352207e-1, 7.8452789304120706e-1, 1.1555935675460669e+0, 1.7115298466871347e+0, 2.5897019911803472e+0, 4.0862530420883101e+0, 6.9396189328516171e+0, 13.443814172272431e+0, 34.001813414873574e+0, 181.98965332991693e+0],
    [2.0754424341283090e-3, 1.8887592459816601e-2, 5.3658014548213084e-2, 1.0884885454501933e-1, 1.8862266668962117e-1, 2.9954903459405208e-1, 4.5185308380311652e-1, 6.6164964801649238e-1, 9.5509492609113843e-1, 1.3765373767867681e+0, 2.0057094213304626e+0, 2.9974863464885758e+0, 4.6856434232417716e+0, 7.9023399751558259e+0, 15.232632558400770e+0, 38.399180598022650e+0, 205.16023103739158e+0],
    [1.8539963414043730e-3, 1.6852276947378890e-2, 4.7759641118871650e-2, 9.6517662877457096e-2, 1.6636649640437165e-1, 2.6232651719296074e-1, 3.9202397022416274e-1, 5.6711232331318464e-1, 8.0578967544389658e-1, 1.1374575501399537e+0, 1.6118526781020055e+0, 2.3182957744259616e+0, 3.4301980006685247e+0, 5.3211990723247961e+0, 8.9227664393420772e+0, 17.128366583322402e+0, 43.059125399051125e+0, 229.71413594275947e+0],
    [1.6661998936375252e-3, 1.5130014686433139e-2, 4.2790695960997299e-2, 8.6200730889532058e-2, 1.4792271329238424e-1, 2.3186595750538547e-1, 3.4384897279841593e-1, 4.9253668994919913e-1, 6.9103506867637833e-1, 9.5970145594169633e-1, 1.3313348322389476e+0, 1.8613408062545294e+0, 2.6491513055224363e+0, 3.8877446160652292e+0, 5.9928609675506298e+0, 10.000863418852175e+0, 19.130998189134936e+0, 47.981640664446113e+0, 255.65136670034094e+0],
    [1.5055636736750460e-3, 1.3659581309068787e-2, 3.8564342567293824e-2, 7.7476594928727068e-2, 1.3245147741657513e-1, 2.0658296700885233e-1, 3.0439699080823515e-1, 4.3248851020324228e-1, 6.0056920785975063e-1, 8.2323977038557735e-1, 1.1231054875957920e+0, 1.5365239604700129e+0, 2.1248567569558026e+0, 2.9981746126480335e+0, 4.3700575829188789e+0, 6.7005849497038310e+0, 11.136604650698095e+0, 21.240513731235973e+0, 53.166720972969638e+0, 282.97192228864295e+0],
    [1.3670907867368809e-3, 1.2394054047073585e-2, 3.4938717738704776e-2, 7.0029665723141531e-2, 1.1933546517548120e-1, 1.8533975034810136e-1, 2.7162214849373177e-1, 3.8330281537433028e-1, 5.2775249147995862e-1, 7.1575249251405546e-1, 9.6345103210237267e-1, 1.2957976481725483e+0, 1.7528752562478540e+0, 2.4022925139112141e+0, 3.3652895418982898e+0, 4.8770850124786650e+0, 7.4443374249155493e+0, 12.329970060272637e+0, 23.456902742141821e+0, 58.614362155227502e+0, 311.67580192095023e+0],
    [1.2468830266566070e-3, 1.1296974077260939e-2, 3.1804472951472436e-2, 6.3619574436888336e-2, 1.0811189954427899e-1, 1.6730017611467516e-1, 2.4405695487560790e-1, 3.4242592106441611e-1, 4.6811614228539370e-1, 6.2928567081422645e-1, 8.3781715700385527e-1, 1.1114655761383376e+0, 1.4776257531369692e+0, 1.9802761199884001e+0, 2.6935661694090105e+0, 3.7504379423093369e+0, 5.4087870441105496e+0, 8.2240924562866579e+0, 13.580944085234207e+0, 25.780157081866051e+0, 64.324560961905946e+0, 341.76300498341980e+0],
    [1.1418631828867911e-3, 1.0339660911653800e-2, 2.9076181798097988e-2, 5.8060466666749248e-2, 9.8427835316294182e-2, 1.5183741234468401e-1, 2.2062391084280355e-1, 3.0802869139363407e-1, 4.1855186217289765e-1, 5.5849619707813161e-1, 7.3682598952358321e-1, 9.6656238513293489e-1, 1.2671304167611063e+0, 1.6684742780654425e+0, 2.2186404130584330e+0, 2.9986146322141836e+0, 4.1535747513207993e+0, 5.9651326283714126e+0, 9.0398297521904451e+0, 14.889514507506985e+0, 28.210270342431136e+0, 70.297314830298915e+0, 373.23353099141679e+0],
    [1.0495759261988334e-3, 9.4992992354385334e-3, 2.6686295586583196e-2, 5.3206697955337431e-2, 9.0009970388381536e-2, 1.3847326383472790e-1, 2.0051570393946337e-1, 2.7876963531845218e-1, 3.7683660713108600e-1, 4.9967393580009960e-1, 6.5418912561449615e-1, 8.5017628790014737e-1, 1.1018357175881531e+0, 1.4303284449010451e+0, 1.8682541268706728e+0, 2.4679012551940344e+0, 3.3173886234481417e+0, 4.5746645870722179e+0, 6.5460972759896340e+0, 9.8915332475732629e+0, 16.255671624263934e+0, 30.747237423089797e+0, 76.532621717181575e+0, 406.08737955819712e+0],
    [9.6804284738431230e-4, 8.7575539343254928e-3, 2.4580815547761405e-2, 4.8942752455150472e-2, 8.2643793737600240e-2, 1.2683727043286128e-1, 1.8311667069998602e-1, 2.5364456253704884e-1, 3.4134207545566180e-1, 4.5016937343104198e-1, 5.8554703532077252e-1, 7.5500228999917481e-1, 9.6918565647872618e-1, 1.2435195346086746e+0, 1.6009686601323015e+0, 2.0768956135707138e+0, 2.7280060286023412e+0, 3.6498491702681332e+0, 5.0136793389300007e+0, 7.1516614535243813e+0, 10.779190085915269e+0, 17.679407649692762e+0, 33.391054222461704e+0, 83.030479977314323e+0, 440.32455037210190e+0],
    [8.9565544579415255e-4, 8.0995527542570581e-3, 2.2716144347385255e-2, 4.5176009998213853e-2, 7.6158887961076633e-2, 1.1663848431984212e-1, 1.6794992820605648e-1, 2.3188820866452553e-1, 3.1085069091583327e-1, 4.0804436959930529e-1, 5.2779092420711328e-1, 6.7598365319794951e-1, 8.6078710994700593e-1, 1.0937368186145631e+0, 1.3915217951874831e+0, 1.7789794003868798e+0, 2.2943435454843417e+0, 2.9989128434113856e+0, 3.9959651029812478e+0, 5.4705964337941644e+0, 7.7818094208903095e+0, 11.702789877157626e+0, 19.160716276781697e+0, 36.141717412159582e+0, 89.790888273867823e+0, 475.94504317971854e+0],
    [8.3109512231001495e-4, 7.5131289999639659e-3, 2.1056762228657961e-2, 4.1831472800230962e-2, 7.0418380847064122e-2, 1.0764559262935149e-1, 1.5464094439970514e-1, 2.1290812273042229e-1, 2.8443540318795413e-1, 3.7185131035702608e-1, 4.7864959901382474e-1, 6.0951929142249152e-1, 7.7083812244638825e-1, 9.7142732494617946e-1, 1.2237373962444573e+0, 1.5457695551603108e+0, 1.9643035543347287e+0, 2.5205537131838664e+0, 3.2805879923783382e+0, 4.3557112384146946e+0, 5.9453975688643611e+0, 8.4365283763879209e+0, 12.662324149042576e+0, 20.699592351914730e+0, 38.999224268126256e+0, 96.813845511527402e+0, 512.94885777328879e+0],
    [7.7327265934614174e-4, 6.9882508946790789e-3, 1.9573489101087663e-2, 3.8847864637965368e-2, 6.5311250720158831e-2, 9.9672659091338711e-2, 1.4289191032726365e-1, 1.9623917849107639e-1, 2.6137903585278396e-1, 3.4048907901994533e-1, 4.3642861876513319e-1, 5.5298158998816316e-1, 6.9521214980263677e-1, 8.6999572387224727e-1, 1.0868307890446043e+0, 1.3591137397500017e+0, 1.7062043430069920e+0, 2.1568951145849722e+0, 2.7554903420777214e+0, 3.5730040885853247e+0, 4.7290670414068325e+0, 6.4380677720692975e+0, 9.1158078193148013e+0, 13.657785936164659e+0, 22.296031630204964e+0, 41.963572543442722e+0, 104.09935078594111e+0, 551.33599398118217e+0],
    [7.2128194564740752e-4, 6.5165867490334176e-3, 1.8242169108187744e-2, 3.6174706944078613e-2, 6.0746630485518078e-2, 9.2568726696294061e-2, 1.3246337474487628e-1, 1.8151161540602557e-1, 2.4111887374480270e-1, 3.1310655640913304e-1, 3.9984041967064188e-1, 5.0441237267625860e-1, 6.3090166347065471e-1, 7.8475672612933998e-1, 9.7336500077332953e-1, 1.2069236234854513e+0, 1.4998064894190902e+0, 1.8727788041083879e+0, 2.3567166558988347e+0, 2.9991242138096361e+0, 3.8761386831078007e+0, 5.1160156250390810e+0, 6.9485946963461126e+0, 9.8196390688702731e+0, 14.689169468495249e+0, 23.950030589416853e+0, 45.034760371338376e+0, 111.64740334510042e+0, 591.10645166061062e+0],
    [6.7436423858690423e-4, 6.0911701752723135e-3, 1.7042663914726688e-2, 3.3770100579734324e-2, 5.6649534609952658e-2, 8.6210122382939769e-2, 1.2316086250453282e-1, 1.6842816229032328e-1, 2.2320778254362920e-1, 2.8903640974860379e-1, 3.6789065056317112e-1, 4.6232515675023910e-1, 5.7566774544675883e-1, 7.1229929883268576e-1, 8.7806261702092866e-1, 1.0808722364210886e+0, 1.3316459770568605e+0, 1.6457673300845621e+0, 2.0454542277297773e+0, 2.5637374631125206e+0, 3.2514312621986455e+0, 4.1899732254466094e+0, 5.5165429945418197e+0, 7.4769680832474525e+0, 10.548014896887539e+0, 15.756469932714267e+0, 25.661586286947824e+0, 48.212786190469123e+0, 119.45800255953848e+0, 632.26023069200134e+0],
    [6.3188030795311256e-4, 5.7061398509158145e-3, 1.5958074377719465e-2, 3.1599024262999016e-2, 5.2957614335718592e-2, 8.0494684232131515e-2, 1.1482497679045181e-1, 1.5674738549368781e-1, 2.0728641098615664e-1, 2.6774869366161895e-1, 3.3980028211803460e-1, 4.2557300057118946e-1, 5.2781244442213382e-1, 6.5008669605942016e-1, 7.9708543296514910e-1, 9.7505658701549875e-1, 1.1924574198151743e+0, 1.4609489039066194e+0, 1.7969565829860152e+0, 2.2241986989346772e+0, 2.7779321228812770e+0, 3.5123915105929826e+0, 4.5144922723425346e+0, 5.9306374689397339e+0, 8.0231793507898259e+0, 11.300929244520692e+0, 16.859683287482135e+0, 27.430696248828829e+0, 51.497648686801327e+0, 127.53114789911721e+0, 674.79733097461019e+0],
    [5.9328853537205541e-4, 5.3565354267364080e-3, 1.4974133098434223e-2, 2.9632015965484335e-2, 4.9618666086360908e-2, 7.5337377290736125e-2, 1.0732397775003935e-1, 1.4627138294241019e-1, 1.9306297824660873e-1, 2.4881771516959776e-1, 3.1495108687257702e-1, 3.9325804722158570e-1, 4.8602680851247133e-1, 5.9619688382533305e-1, 7.2758172485417912e-1, 8.8518757034288328e-1, 1.0756787412994259e+0, 1.3080712544710576e+0, 1.5947920316449342e+0, 1.9533413948198792e+0, 2.4089856998675806e+0, 2.9992794514729462e+0, 3.7819882583328432e+0, 4.8496828790012615e+0, 6.3582892340038383e+0, 8.5872212735768023e+0, 12.078377001579031e+0, 17.998806119124345e+0, 29.257358382793497e+0, 54.889346748010532e+0, 135.86683891478876e+0, 718.71775242307245e+0],
]

SMALLX_R1 = [
    [-2.0000000000000000e-1],
    [-2.9043023608241048e-2, -6.3762364305842562e-1],
    [-9.2887576435815225e-3, -1.1951128552785324e-1, -1.0250461106747191e+0],
    [-4.0964585066055473e-3, -4.4890257068240478e-2, -2.0438909052457619e-1, -1.3936830174299895e+0],
    [-2.1586596792093941e-3, -2.2025875441991006e-2, -8.1652002297032008e-2, -2.8319336963842483e-1, -1.7538272358004856e+0],
    [-1.2746635960566440e-3, -1.2517637421436372e-2, -4.2126661056278350e-2, -1.1643959506821933e-1, -3.5818332391233796e-1, -2.1094581189456713e+0],
    [-8.1474541067518775e-4, -7.8191948592848125e-3, -2.4926583586087684e-2, -6.1742968138351764e-2, -1.4946090168963472e-1, -4.3075322392303430e-1, -2.4624134168756902e+0],
    [-5.5209775370786416e-4, -5.2200471991657186e-3, -1.6089052377609530e-2, -3.7425681419423256e-2, -8.0546982549406397e-2, -1.8115804834921864e-1, -5.0171691909189797e-1, -2.8136548076232070e+0],
    [-3.9128793824960372e-4, -3.6618841232814174e-3, -1.1035161801399864e-2, -2.4666594289076288e-2, -4.9583337129966131e-2, -9.8615854013874445e-2, -2.1188037239220452e-1, -5.7156739043821691e-1, -3.1637332530088660e+0],
    [-2.8735643016907953e-4, -2.6695573111981588e-3, -7.9183459810541932e-3, -1.7226959931098501e-2, -3.3143532801926068e-2, -6.1336292629096576e-2, -1.1608378628726883e-1, -2.4187653415527395e-1, -6.4061721590836179e-1, -3.5129867600279675e+0],
    [-2.1721493894067231e-4, -2.0069781671564177e-3, -5.8844609317808519e-3, -1.2557163722062369e-2, -2.3442964495947751e-2, -4.1407443975499142e-2, -7.2716667236503454e-2, -1.3307161766708052e-1, -2.7132169184536604e-1, -7.0907305787933108e-1, -3.8616340724736650e+0],
    [-1.6817109578649128e-4, -1.5473951547754654e-3, -4.4974810464893884e-3, -9.4610329924351935e-3, -1.7283930706405960e-2, -2.9559730009439098e-2, -4.9442112335343849e-2, -8.3776873502377368e-2, -1.4967604380891887e-1, -3.0034073973394479e-1, -7.7707659704547830e-1, -4.2098229537930950e+0],
    [-1.3285112422394523e-4, -1.2184532717779003e-3, -3.5175460763987357e-3, -7.3192298938802295e-3, -1.3156204551711630e-2, -2.1979910262912195e-2, -3.5539199261286876e-2, -5.7262860746175067e-2, -9.4567972106943885e-2, -1.6597205907358651e-1, -3.2902436271893531e-1, -8.4472803037235640e-1, -4.5576567922379245e+0],
    [-1.0677051532153164e-4, -9.7673537956121713e-4, -2.8047035130905163e-3, -5.7863452615265385e-3, -1.0271991212320409e-2, -1.6861871858248067e-2, -2.6598537919710128e-2, -4.1376664665133671e-2, -6.4893819392576949e-2, -1.0513407568386457e-1, -1.8201754471424964e-1, -3.5743967052218842e-1, -9.1210013356197439e-1, -4.9052100831686550e+0],
    [-8.7094697700289904e-5, -7.9508506041566912e-4, -2.2733012351637930e-3, -4.6581908043545880e-3, -8.1884848066245945e-3, -1.3259878159210630e-2, -2.0529695833234090e-2, -3.1124587849906373e-2, -4.7080258317227220e-2, -7.2359729254659017e-2, -1.1551174822203321e-1, -1.9785739485404448e-1, -3.8563723720153754e-1, -9.7924699822770487e-1, -5.2525378564597902e+0],
    [-7.1971973356738330e-5, -6.5591018293086775e-4, -1.8688029521335360e-3, -3.8082522681357664e-3, -6.6418466281042484e-3, -1.0639998728226956e-2, -1.6236103714569910e-2, -2.4139319785883294e-2, -3.5556725155263597e-2, -5.2662456821142606e-2, -7.9683138190164529e-2, -1.2573086283348647e-1, -2.1352673639543437e-1, -4.1365582068530556e-1, -1.0462096435345715e+0, -5.5996816409205208e+0],
    [-6.0157751713864029e-5, -5.4746644811062611e-4, -1.5553047695134227e-3, -3.1550392621744732e-3, -5.4673236721629325e-3, -8.6825807128710749e-3, -1.3097190834872943e-2, -1.9178250667144707e-2, -2.7683910901192418e-2, -3.9899634109761395e-2, -5.8136504966100365e-2, -8.6883662217060169e-2, -1.3581575139831222e-1, -2.2905333261321235e-1, -4.4152558140292087e-1, -1.1130197274789174e+0, -5.9466733634026544e+0],
    [-5.0794420312448576e-5, -4.6170621773640795e-4, -1.3084833183252507e-3, -2.6443195308892355e-3, -4.5579862028594972e-3, -7.1870278683002944e-3, -1.0740382745867472e-2, -1.5537323926388620e-2, -2.2076429464216345e-2, -3.1163220551779554e-2, -4.4160347345260426e-2, -6.3514952723998948e-2, -9.3978027415576020e-2, -1.4578627595410400e-1, -2.4445935450252266e-1, -4.6927031735129867e-1, -1.1797020657274281e+0, -6.2935379710345059e+0],
    [-4.3277919315260394e-5, -3.9298739445280881e-4, -1.1114466483375922e-3, -2.2389800231047288e-3, -3.8421483972047854e-3, -6.0224924027372849e-3, -8.9311421506082060e-3, -1.2793160777901276e-2, -1.7948962822763074e-2, -2.4927310543940164e-2, -3.4580125512699938e-2, -4.8346514448169596e-2, -6.8809124818764580e-2, -1.0098037963805790e-1, -1.5565872642988649e-1, -2.5976268620395261e-1, -4.9690904387363471e-1, -1.2462763808947042e+0, -6.6402952389698946e+0],
    [-3.7174411695680149e-5, -3.3727361256959967e-4, -9.5220598931589689e-4, -1.9130023439191869e-3, -3.2704068497919785e-3, -5.1008140002185761e-3, -7.5159750816848185e-3, -1.0678728646993636e-2, -1.4828869329870386e-2, -2.0326907910754996e-2, -2.7730999693723260e-2, -3.7938863221481800e-2, -5.2465598937180312e-2, -7.4029002781432927e-2, -1.0790265636836738e-1, -1.6544654196799583e-1, -2.7497789260982951e-1, -5.2445712916632033e-1, -1.3127585425424602e+0, -6.9869610441640233e+0],
    [-3.2166842040867787e-5, -2.9162480110761378e-4, -8.2208747620481826e-4, -1.6477568405445066e-3, -2.8078932982466164e-3, -4.3609353023082674e-3, -6.3911093763231004e-3, -9.0188897735136537e-3, -1.2417705681881379e-2, -1.6841235117977776e-2, -2.2669436049467592e-2, -3.0489356427589373e-2, -4.1244123676420093e-2, -5.6524529739087390e-2, -7.9183283338783289e-2, -1.1475494147008623e-1, -1.7516088058624822e-1, -2.9011694259465027e-1, -5.5192712334451342e-1, -1.3791614624759412e+0, -7.3335482804929466e+0],
    [-2.8019843295654090e-5, -2.5386458600586379e-4, -7.1470725733645924e-4, -1.4296533581323221e-3, -2.4294808886354830e-3, -3.7595545194309025e-3, -5.4844259522608518e-3, -7.6949645183014857e-3, -1.0519463871581881e-2, -1.4141251029533179e-2, -1.8827351842783264e-2, -2.4976754519962643e-2, -3.3205073104201554e-2, -4.4500586966031464e-2, -6.0529576840651922e-2, -8.4279504321558133e-2, -1.2154577627214718e-1, -1.8481106643340804e-1, -3.0518975472436420e-1, -5.7932937262620340e-1, -1.4454957519529426e+0, -7.6800675277172989e+0],
    [-2.4556197481436368e-5, -2.2235829917535054e-4, -6.2529423221716104e-4, -1.2486121863817043e-3, -2.1167276412106276e-3, -3.2653206955846025e-3, -4.7446002331785710e-3, -6.6242729331964315e-3, -9.0011153155461859e-3, -1.2010670904906056e-2, -1.5845720204808241e-2, -2.0786287852321180e-2, -2.7250116489486157e-2, -3.5881167270224571e-2, -4.7712697055020064e-2, -6.4486336176649110e-2, -8.9324188200447297e-2, -1.2828242211551425e-1, -1.9440494090732140e-1, -3.2020461306466635e-1, -6.0667248048239002e-1, -1.5117702114042777e+0, -8.0265275482025116e+0],
    [-2.1640740746367699e-5, -1.9586183990594914e-4, -5.5023289869243703e-4, -1.0970453186667512e-3, -1.8558756781109595e-3, -2.8551188419531527e-3, -4.1343444111229560e-3, -5.7478275323392203e-3, -7.7698269511564124e-3, -1.0302555377321641e-2, -1.3488435579680333e-2, -1.7529407997941183e-2, -2.2718262218312436e-2, -2.9491308142289590e-2, -3.8520703646817997e-2, -5.0884561962763596e-2, -6.8399765431920447e-2, -9.4322981176746760e-2, -1.3497107785545637e-1, -2.0394913912522192e-1, -3.3516848709822544e-1, -6.3396365820803704e-1, -1.5779922003542593e+0, -8.3729356609937551e+0],
    [-1.9169165294738857e-5, -1.7341690959060382e-4, -4.8674882272794861e-4, -9.6916341495347469e-4, -1.6365107670811929e-3, -2.5116291174824015e-3, -3.6260726871284361e-3, -5.0226646046940364e-3, -6.7592490189239961e-3, -8.9142450184364748e-3, -1.1594990798431139e-2, -1.4950540396023264e-2, -1.9191795177796558e-2, -2.4624149200171775e-2, -3.1702349705590128e-2, -4.1126645813281461e-2, -5.4019921358462201e-2, -7.2274240995408579e-2, -9.9280778988712886e-2, -1.4161705848563131e-1, -2.1344930863198552e-1, -3.5008728019193588e-1, -6.6120899450419216e-1, -1.6441679203428579e+0, -8.7192980271703347e+0],
    [-1.7060103729412429e-5, -1.5427719531918206e-4, -4.3268846375971915e-4, -8.6049542853740672e-4, -1.4506454849728882e-3, -2.2216854156160403e-3, -3.1990462515439330e-3, -4.4169182602766767e-3, -5.9209655412539670e-3, -7.7722737066534341e-3, -1.0053160461087872e-2, -1.2875879108532372e-2, -1.6395944951371542e-2, -2.0833082259325012e-2, -2.6505177051190155e-2, -3.3885321912131044e-2, -4.3701781818749365e-2, -5.7122149398312107e-2, -7.6113621009166624e-2, -1.0420183683417456e-1, -1.4822494135029161e-1, -2.2291028337443096e-1, -3.6496602431965138e-1, -6.8841366499351585e-1, -1.7103026337879585e+0, -9.0656198700898769e+0],
    [-1.5249451785504861e-5, -1.3785557798099020e-4, -3.8636260970014607e-4, -7.6754995963726536e-4, -1.2920803825149380e-3, -1.9751484886119540e-3, -2.8374485210955071e-3, -3.9065710592738036e-3, -5.2189982236321858e-3, -6.8229598230646988e-3, -8.7825614497949494e-3, -1.1183840209587000e-2, -1.4143818760484188e-2, -1.7824354586168430e-2, -2.2453897178797382e-2, -2.8362744131381850e-2, -3.6042267052013371e-2, -4.6248691985025072e-2, -6.0194275089510793e-2, -7.9921307126875131e-2, -1.0908986364888736e-1, -1.5479868580528295e-1, -2.3233622291821239e-1, -3.7980903398008679e-1, -7.1558209666286708e-1, -1.7764008350738973e+0, -9.4119056472163080e+0],
    [-1.3686241758338792e-5, -1.2368585654299255e-4, -3.4643343541748076e-4, -6.8757282545071448e-4, -1.1559513401798023e-3, -1.7641178600236940e-3, -2.5290603597745778e-3, -3.4732597963022370e-3, -4.6261776257129905e-3, -6.0263553808839881e-3, -7.7244003321262511e-3, -9.7872847785515604e-3, -1.2304639819515695e-2, -1.5398154404818536e-2, -1.9235943168931049e-2, -2.4055110438053128e-2, -3.0198306955875964e-2, -3.8175134771415437e-2, -4.8769740567747282e-2, -6.3239010417439375e-2, -8.3700301617820044e-2, -1.1394810216051854e-1, -1.6134173131530622e-1, -2.4173072453388778e-1, -3.9462002885318521e-1, -7.4271809811403047e-1, -1.8424663855918781e+0, -9.7581591855076490e+0],
    [-1.2329605908502693e-5, -1.1139464528262252e-4, -3.1183195056731187e-4, -6.1837105887313868e-4, -1.0384039399233859e-3, -1.5823713965178472e-3, -2.2643311922201073e-3, -3.1027626565132575e-3, -4.1216901494838068e-3, -5.3522488275065476e-3, -6.8348789687289210e-3, -8.6224337209616854e-3, -1.0784643820011192e-2, -1.3414644891099829e-2, -1.6638717961937257e-2, -2.0631173051033355e-2, -2.5637717767847695e-2, -3.2013312890741673e-2, -4.0285754801689482e-2, -5.1267080577942497e-2, -6.6258780907825653e-2, -8.7453258547676598e-2, -1.1877939651873697e-1, -1.6785707810034655e-1, -2.5109691399137178e-1, -4.0940223229772398e-1, -7.6982496361262181e-1, -1.9085026212837678e+0, -10.104383789070267e+0],
    [-1.1146516340279409e-5, -1.0068049876483163e-4, -2.8169692421035848e-4, -5.5818348065676569e-4, -9.3635594396615963e-4, -1.4249607005444590e-3, -2.0357167356121127e-3, -2.7839365667822030e-3, -3.6893848354318877e-3, -4.7774613181587403e-3, -6.0808371993912582e-3, -7.6417381281031256e-3, -9.5151693462274187e-3, -1.1773542129465880e-2, -1.4513431686296341e-2, -1.7865656800348571e-2, -2.2010677306724967e-2, -2.7202765786521687e-2, -3.3809160788921939e-2, -4.2375825836570589e-2, -5.3742665490886703e-2, -6.9255755792505941e-2, -9.1182528835401978e-2, -1.2358624930987525e-1, -1.7434735366756263e-1, -2.6043751954899615e-1, -4.2415845102393097e-1, -7.9690555686725823e-1, -1.9745124390006361e+0, -10.450582325487625e+0],
    [-1.0110084927249801e-5, -9.1298237614653032e-5, -2.5532919004351143e-4, -5.0558438820798426e-4, -8.4732182937149748e-4, -1.2879149477141042e-3, -1.8371996286472289e-3, -2.5079581678990050e-3, -3.3165825757785062e-3, -4.2839790985859031e-3, -5.4368045138885536e-3, -6.8091680091390314e-3, -8.4449991107541411e-3, -1.0401387136950723e-2, -1.2753366927442386e-2, -1.5600905392247980e-2, -1.9079318717042789e-2, -2.3375182462505910e-2, -2.8751305327776243e-2, -3.5587179182954835e-2, -4.4446913966100433e-2, -5.6198264169487721e-2, -7.2231876357480554e-2, -9.4890199503035742e-2, -1.2837086961263721e-1, -1.8081486791233108e-1, -2.6975493259971416e-1, -4.3889113998126126e-1, -8.2396237898882124e-1, -2.0404983663858754e+0, -10.796757295593763e+0],
    [-9.1982718662334172e-6, -8.3047060879634233e-5, -2.3215710230130578e-4, -4.5941110024006721e-4, -7.6928164474978152e-4, -1.1680213533447461e-3, -1.6639376395354938e-3, -2.2677733789520959e-3, -2.9932244689396703e-3, -3.8576389948774846e-3, -4.8829625871717367e-3, -6.0970239879315613e-3, -7.5352993567825012e-3, -9.2433625399276442e-3, -1.1280336819444638e-2, -1.3723838299889663e-2, -1.6677189787587998e-2, -2.0280174487923374e-2, -2.4725457854960220e-2, -3.0284362710385724e-2, -3.7348615501822955e-2, -4.6500456611983663e-2, -5.8635476873377415e-2, -7.5188881844980799e-2, -9.8578127658974238e-2, -1.3313521354382639e-1, -1.8726165893920978e-1, -2.7905125766084256e-1, -4.5360245554718600e-1, -8.5099762400016329e-1, -2.1064626188339343e+0, -11.142910890280193e+0],
]

SMALLX_W0 = [
    [1.0000000000000000e+0],
    [6.5214515486254614e-1, 3.4785484513745386e-1],
    [4.6791393457269105e-1, 3.6076157304813861e-1, 1.7132449237917035e-1],
    [3.6268378337836198e-1, 3.1370664587788729e-1, 2.2238103445337447e-1, 1.0122853629037626e-1],
    [2.9552422471475287e-1, 2.6926671930999636e-1, 2.1908636251598204e-1, 1.4945134915058059e-1, 6.6671344308688138e-2],
    [2.4914704581340279e-1, 2.3349253653835481e-1, 2.0316742672306592e-1, 1.6007832854334623e-1, 1.0693932599531843e-1, 4.7175336386511827e-2],
    [2.1526385346315779e-1, 2.0519846372129560e-1, 1.8553839747793781e-1, 1.5720316715819353e-1, 1.2151857068790318e-1, 8.0158087159760210e-2, 3.5119460331751863e-2],
    [1.8945061045506850e-1, 1.8260341504492359e-1, 1.6915651939500254e-1, 1.4959598881657673e-1, 1.2462897125553387e-1, 9.5158511682492785e-2, 6.2253523938647893e-2, 2.7152459411754095e-2],
    [1.6914238296314359e-1, 1.6427648374583272e-1, 1.5468467512626524e-1, 1.4064291467065065e-1, 1.2255520671147846e-1, 1.0094204410628717e-1, 7.6425730254889057e-2, 4.9714548894969796e-2, 2.1616013526483310e-2],
    [1.5275338713072585e-1, 1.4917298647260375e-1, 1.4209610931838205e-1, 1.3168863844917663e-1, 1.1819453196151842e-1, 1.0193011981724044e-1, 8.3276741576704749e-2, 6.2672048334109064e-2, 4.0601429800386941e-2, 1.7614007139152118e-2],
    [1.3925187285563199e-1, 1.3654149834601517e-1, 1.3117350478706237e-1, 1.2325237681051242e-1, 1.1293229608053922e-1, 1.0041414444288096e-1, 8.5941606217067727e-2, 6.9796468424520488e-2, 5.2293335152683286e-2, 3.3774901584814155e-2, 1.4627995298272201e-2],
    [1.2793819534675216e-1, 1.2583745634682830e-1, 1.2167047292780339e-1, 1.1550566805372560e-1, 1.0744427011596563e-1, 9.7618652104113888e-2, 8.6190161531953276e-2, 7.3346481411080306e-2, 5.9298584915436781e-2, 4.4277438817419806e-2, 2.8531388628933663e-2, 1.2341229799987200e-2],
    [1.1832141527926228e-1, 1.1666044348529658e-1, 1.1336181654631967e-1, 1.0847184052857659e-1, 1.0205916109442542e-1, 9.4213800355914148e-2, 8.5045894313485239e-2, 7.4684149765659746e-2, 6.3274046329574836e-2, 5.0975825297147812e-2, 3.7962383294362764e-2, 2.4417851092631909e-2, 1.0551372617343007e-2],
    [1.1004701301647520e-1, 1.0871119225829414e-1, 1.0605576592284642e-1, 1.0211296757806077e-1, 9.6930657997929916e-2, 9.0571744393032841e-2, 8.3113417228901218e-2, 7.4646214234568779e-2, 6.5272923966999596e-2, 5.5107345675716745e-2, 4.4272934759004228e-2, 3.2901427782304380e-2, 2.1132112592771260e-2, 9.1242825930945177e-3],
    [1.0285265289355884e-1, 1.0176238974840550e-1, 9.9593420586795267e-2, 9.6368737174644260e-2, 9.2122522237786129e-2, 8.6899787201082980e-2, 8.0755895229420215e-2, 7.3755974737705206e-2, 6.5974229882180495e-2, 5.7493156217619066e-2, 4.8402672830594053e-2, 3.8799192569627050e-2, 2.8784707883323369e-2, 1.8466468311090959e-2, 7.9681924961666056e-3],
    [9.6540088514727801e-2, 9.5638720079274859e-2, 9.3844399080804566e-2, 9.1173878695763885e-2, 8.7652093004403811e-2, 8.3311924226946755e-2, 7.8193895787070306e-2, 7.2345794108848506e-2, 6.5822222776361847e-2, 5.8684093478535547e-2, 5.0998059262376176e-2, 4.2835898022226681e-2, 3.4273862913021433e-2, 2.5392065309262059e-2, 1.6274394730905671e-2, 7.0186100094700966e-3],
    [9.0956740330259874e-2, 9.0203044370640730e-2, 8.8701897835693869e-2, 8.6465739747035750e-2, 8.3513099699845655e-2, 7.9868444339771845e-2, 7.5561974660031931e-2, 7.0629375814255725e-2, 6.5111521554076411e-2, 5.9054135827524493e-2, 5.2507414572678106e-2, 4.5525611523353272e-2, 3.8166593796387516e-2, 3.0491380638446132e-2, 2.2563721985494970e-2, 1.4450162748595035e-2, 6.2291405559086847e-3],
    [8.5983275670394747e-2, 8.5346685739338627e-2, 8.4078218979661935e-2, 8.2187266704339710e-2, 7.9687828912071602e-2, 7.6598410645870675e-2, 7.2941885005653061e-2, 6.8745323835736443e-2, 6.4039797355015490e-2, 5.8860144245324817e-2, 5.3244713977759919e-2, 4.7235083490265978e-2, 4.0875750923644895e-2, 3.4213810770307230e-2, 2.7298621498568779e-2, 2.0181515297735472e-2, 1.2915947284065574e-2, 5.5657196642450454e-3],
    [8.1525029280385787e-2, 8.0982493770597101e-2, 7.9901033243527822e-2, 7.8287844658210948e-2, 7.6153663548446396e-2, 7.3512692584743457e-2, 7.0382507066898955e-2, 6.6783937979140412e-2, 6.2740933392133054e-2, 5.8280399146997206e-2, 5.3432019910332320e-2, 4.8228061860758683e-2, 4.2703158504674434e-2, 3.6894081594024738e-2, 3.0839500545175055e-2, 2.4579739738232376e-2, 1.8156577709613237e-2, 1.1613444716468674e-2, 5.0028807496393457e-3],
    [7.7505947978424811e-2, 7.7039818164247966e-2, 7.6110361900626242e-2, 7.4723169057968264e-2, 7.2886582395804059e-2, 7.0611647391286780e-2, 6.7912045815233904e-2, 6.4804013456601038e-2, 6.1306242492928939e-2, 5.7439769099391551e-2, 5.3227846983936824e-2, 4.8695807635072232e-2, 4.3870908185673272e-2, 3.8782167974472018e-2, 3.3460195282547847e-2, 2.7937006980023401e-2, 2.2245849194166957e-2, 1.6421058381907889e-2, 1.0498284531152814e-2, 4.5212770985331913e-3],
    [7.3864234232172880e-2, 7.3460813453467528e-2, 7.2656175243804105e-2, 7.1454714265170983e-2, 6.9862992492594160e-2, 6.7889703376521945e-2, 6.5545624364908979e-2, 6.2843558045002576e-2, 5.9798262227586654e-2, 5.6426369358018382e-2, 5.2746295699174070e-2, 4.8778140792803245e-2, 4.4543577771965878e-2, 4.0065735180692262e-2, 3.5369071097592111e-2, 3.0479240699603468e-2, 2.5422959526113048e-2, 2.0227869569052645e-2, 1.4922443697357494e-2, 9.5362203017485024e-3, 4.1059986046490846e-3],
    [7.0549157789354069e-2, 7.0197685473558213e-2, 6.9496491861572578e-2, 6.8449070269366661e-2, 6.7060638906293652e-2, 6.5338114879181435e-2, 6.3290079733203855e-2, 6.0926736701561968e-2, 5.8259859877595495e-2, 5.5302735563728053e-2, 5.2070096091704462e-2, 4.8578046448352038e-2, 4.4843984081970031e-2, 4.0886512310346219e-2, 3.6725347813808874e-2, 3.2381222812069821e-2, 2.7875782821281010e-2, 2.3231481902019211e-2, 1.8471481736814749e-2, 1.3619586755579986e-2, 8.7004813675248441e-3, 3.7454048031127775e-3],
    [6.7518685849036459e-2, 6.7210613600678176e-2, 6.6595874768454887e-2, 6.5677274267781207e-2, 6.4459003467139070e-2, 6.2946621064394508e-2, 6.1147027724650481e-2, 5.9068434595546315e-2, 5.6720325843991236e-2, 5.4113415385856754e-2, 5.1259598007143021e-2, 4.8171895101712201e-2, 4.4864395277318127e-2, 4.1352190109678730e-2, 3.7651305357386071e-2, 3.3778627999106897e-2, 2.9751829552202756e-2, 2.5589286397130011e-2, 2.1309998754136501e-2, 1.6933514007836238e-2, 1.2479883770988684e-2, 7.9698982297246225e-3, 3.4303008681070483e-3],
    [6.4737696812683923e-2, 6.4466164435950082e-2, 6.3924238584648187e-2, 6.3114192286254026e-2, 6.2039423159892664e-2, 6.0704439165893880e-2, 5.9114839698395636e-2, 5.7277292100403216e-2, 5.5199503699984163e-2, 5.2890189485193667e-2, 5.0359035553854475e-2, 4.7616658492490475e-2, 4.4674560856694280e-2, 4.1545082943464749e-2, 3.8241351065830706e-2, 3.4777222564770439e-2, 3.1167227832798089e-2, 2.7426509708356948e-2, 2.3570760839324379e-2, 1.9616160457355528e-2, 1.5579315722943849e-2, 1.1477234579234539e-2, 7.3275539012762621e-3, 3.1533460523058386e-3],
    [6.2176616655347262e-2, 6.1936067420683243e-2, 6.1455899590316664e-2, 6.0737970841770216e-2, 5.9785058704265458e-2, 5.8600849813222446e-2, 5.7189925647728384e-2, 5.5557744806212518e-2, 5.3710621888996247e-2, 5.1655703069581138e-2, 4.9400938449466315e-2, 4.6955051303948433e-2, 4.4327504338803275e-2, 4.1528463090147697e-2, 3.8568756612587675e-2, 3.5459835615146154e-2, 3.2213728223578017e-2, 2.8842993580535198e-2, 2.5360673570012390e-2, 2.1780243170124793e-2, 1.8115560713489390e-2, 1.4380822761485574e-2, 1.0590548383650969e-2, 6.7597991957454015e-3, 2.9086225531551410e-3],
    [5.9810365745291860e-2, 5.9596260171248158e-2, 5.9168815466042970e-2, 5.8529561771813869e-2, 5.7680787452526828e-2, 5.6625530902368597e-2, 5.5367569669302653e-2, 5.3911406932757265e-2, 5.2262255383906993e-2, 5.0426018566342377e-2, 4.8409269744074897e-2, 4.6219228372784794e-2, 4.3863734259000408e-2, 4.1351219500560272e-2, 3.8690678310423979e-2, 3.5891634835097233e-2, 3.2964109089718798e-2, 2.9918581147143947e-2, 2.6765953746504013e-2, 2.3517513553984462e-2, 2.0184891507980792e-2, 1.6780023396300736e-2, 1.3315114982340961e-2, 9.8026345794627521e-3, 6.2555239629732769e-3, 2.6913169500471111e-3],
    [5.7617536707147025e-2, 5.7426137054112115e-2, 5.7043973558794599e-2, 5.6472315730625965e-2, 5.5713062560589988e-2, 5.4768736213057986e-2, 5.3642473647553611e-2, 5.2338016198298745e-2, 5.0859697146188144e-2, 4.9212427324528886e-2, 4.7401678806444991e-2, 4.5433466728276714e-2, 4.3314329309597015e-2, 4.1051306136644974e-2, 3.8651914782102517e-2, 3.6124125840383553e-2, 3.3476336464372646e-2, 3.0717342497870676e-2, 2.7856309310595870e-2, 2.4902741467208773e-2, 2.1866451422853086e-2, 1.8757527621469378e-2, 1.5586303035924132e-2, 1.2363328128847644e-2, 9.0993694555093969e-3, 5.8056110152399849e-3, 2.4974818357615858e-3],
    [5.5579746306514396e-2, 5.5407952503245123e-2, 5.5064895901762426e-2, 5.4551636870889421e-2, 5.3869761865714486e-2, 5.3021378524010764e-2, 5.2009109151741400e-2, 5.0836082617798481e-2, 4.9505924683047579e-2, 4.8022746793600258e-2, 4.6391133373001897e-2, 4.4616127652692283e-2, 4.2703216084667087e-2, 4.0658311384744518e-2, 3.8487734259247662e-2, 3.6198193872315186e-2, 3.3796767115611761e-2, 3.1290876747310448e-2, 2.8688268473822742e-2, 2.5996987058391952e-2, 2.3225351562565317e-2, 2.0381929882402573e-2, 1.7475512911400947e-2, 1.4515089278021472e-2, 1.1509824340383382e-2, 8.4690631633078877e-3, 5.4025222460153378e-3, 2.3238553757732155e-3],
    [5.3681119863334849e-2, 5.3526343304058252e-2, 5.3217236446579014e-2, 5.2754690526370833e-2, 5.2140039183669819e-2, 5.1375054618285725e-2, 5.0461942479953125e-2, 4.9403335508962393e-2, 4.8202285945417748e-2, 4.6862256729026347e-2, 4.5387111514819803e-2, 4.3781103533640251e-2, 4.2048863329582126e-2, 4.0195385409867797e-2, 3.8226013845858433e-2, 3.6146426867087271e-2, 3.3962620493416011e-2, 3.1680891253809327e-2, 2.9307818044160491e-2, 2.6850243181981868e-2, 2.4315252724963953e-2, 2.1710156140146236e-2, 1.9042465461893409e-2, 1.6319874234970965e-2, 1.3550237112988812e-2, 1.0741553532878774e-2, 7.9019738499986748e-3, 5.0399816126502431e-3, 2.1677232496274499e-3],
    [5.1907877631220640e-2, 5.1767943174910188e-2, 5.1488451500980934e-2, 5.1070156069855627e-2, 5.0514184532509375e-2, 4.9822035690550181e-2, 4.8995575455756835e-2, 4.8037031819971181e-2, 4.6948988848912205e-2, 4.5734379716114487e-2, 4.4396478795787113e-2, 4.2938892835935642e-2, 4.1365551235584756e-2, 3.9680695452380799e-2, 3.7888867569243444e-2, 3.5994898051084503e-2, 3.4003892724946423e-2, 3.1921219019296329e-2, 2.9752491500788945e-2, 2.7503556749924792e-2, 2.5180477621521248e-2, 2.2789516943997820e-2, 2.0337120729457287e-2, 1.7829901014207720e-2, 1.5274618596784799e-2, 1.2678166476815960e-2, 1.0047557182287984e-2, 7.3899311633454555e-3, 4.7127299269535686e-3, 2.0268119688737585e-3],
    [5.0248000375256282e-2, 5.0121069569043288e-2, 4.9867528594952394e-2, 4.9488017919699293e-2, 4.8983496220517837e-2, 4.8355237963477673e-2, 4.7604830184101232e-2, 4.6734168478415525e-2, 4.5745452214570181e-2, 4.4641178977124414e-2, 4.3424138258047420e-2, 4.2097404410385097e-2, 4.0664328882417441e-2, 3.9128531751963084e-2, 3.7493892582280030e-2, 3.5764540622768141e-2, 3.3944844379410545e-2, 3.2039400581624678e-2, 3.0053022573989870e-2, 2.7990728163314638e-2, 2.5857726954024698e-2, 2.3659407208682793e-2, 2.1401322277669969e-2, 1.9089176658573199e-2, 1.6728811790177316e-2, 1.4326191823806518e-2, 1.1887390117010502e-2, 9.4185794284203876e-3, 6.9260419018309609e-3, 4.4163334569309048e-3, 1.8992056795136905e-3],
    [4.8690957009139720e-2, 4.8575467441503427e-2, 4.8344762234802957e-2, 4.7999388596458308e-2, 4.7540165714830309e-2, 4.6968182816210017e-2, 4.6284796581314417e-2, 4.5491627927418144e-2, 4.4590558163756563e-2, 4.3583724529323453e-2, 4.2473515123653589e-2, 4.1262563242623529e-2, 3.9953741132720341e-2, 3.8550153178615629e-2, 3.7055128540240046e-2, 3.5472213256882384e-2, 3.3805161837141609e-2, 3.2057928354851554e-2, 3.0234657072402479e-2, 2.8339672614259483e-2, 2.6377469715054659e-2, 2.4352702568710873e-2, 2.2270173808383254e-2, 2.0134823153530209e-2, 1.7951715775697343e-2, 1.5726030476024719e-2, 1.3463047896718643e-2, 1.1168139460131129e-2, 8.8467598263639477e-3, 6.5044579689783629e-3, 4.1470332605624676e-3, 1.7832807216964329e-3],
]

SMALLX_W1 = [
    [-3.3333333333333333e-1],
    [-1.2271362192859778e-1, -2.1061971140473555e-1],
    [-5.6487691723447886e-2, -1.4907718645889768e-1, -1.2776845515098777e-1],
    [-3.1384430571429408e-2, -8.9804624256712820e-2, -1.2931437096375243e-1, -8.2829907541438676e-2],
    [-1.9686757690986866e-2, -5.6173759018728277e-2, -9.7115272681211250e-2, -1.0297926219357021e-1, -5.7378281748836732e-2],
    [-1.3404459326117429e-2, -3.7140259226780727e-2, -6.9798025993402459e-2, -8.9903208869919598e-2, -8.1202949733650339e-2, -4.1884430183462780e-2],
    [-9.6762784934135977e-3, -2.5810077192692871e-2, -5.0559277860857934e-2, -7.1997207281479379e-2, -7.8739057440032890e-2, -6.4711830138776666e-2, -3.1839604926079995e-2],
    [-7.2956931243810878e-3, -1.8697575943681034e-2, -3.7385544074891818e-2, -5.6452682904581976e-2, -6.8429140245654983e-2, -6.7705342645285794e-2, -5.2380981359025404e-2, -2.4986373035831236e-2],
    [-5.6884471222090366e-3, -1.4017609368068549e-2, -2.8279396473125229e-2, -4.4297481709585341e-2, -5.7192383961753756e-2, -6.2644131890598724e-2, -5.8019794346925377e-2, -4.3080183147849820e-2, -2.0113905313217501e-2],
    [-4.5548069078836915e-3, -1.0812068870036251e-2, -2.1858322694621932e-2, -3.5065901484532152e-2, -4.7201253922888043e-2, -5.5107972224754840e-2, -5.6377251364257981e-2, -4.9866349375738914e-2, -3.5958202071776785e-2, -1.6531204416842743e-2],
    [-3.7265960577018309e-3, -8.5403678824716811e-3, -1.7229332137015665e-2, -2.8080687367955299e-2, -3.8907666134333469e-2, -4.7433694841593887e-2, -5.1693920888210535e-2, -5.0384549968286703e-2, -4.3099530033836776e-2, -3.0414471142145504e-2, -1.3822516879781982e-2],
    [-3.1038096899801900e-3, -6.8830915722212488e-3, -1.3819746842434521e-2, -2.2762002213180322e-2, -3.2198834723663874e-2, -4.0484183390368121e-2, -4.6081931636853397e-2, -4.7795785285076721e-2, -4.4950377862156904e-2, -3.7497135400073506e-2, -2.6030178540522941e-2, -1.1726256176801588e-2],
    [-2.6240792114390052e-3, -5.6436186987320448e-3, -1.1257772310878891e-2, -1.8670533124689719e-2, -2.6815751926887902e-2, -3.4492520092913837e-2, -4.0518024622316569e-2, -4.3878709377426040e-2, -4.3860783492389182e-2, -4.0143708158048842e-2, -3.2844993055811730e-2, -2.2511371641957784e-2, -1.0071467619841788e-2],
    [-2.2469308790401125e-3, -4.6964849046452919e-3, -9.2974560817277804e-3, -1.5486275275472908e-2, -2.2495801468911307e-2, -2.9439624856328238e-2, -3.5409663026430927e-2, -3.9576455854167826e-2, -4.1281268726971907e-2, -4.0109999958463662e-2, -3.5940867319080381e-2, -2.8960749795930668e-2, -1.9649015970703119e-2, -8.7427392154592045e-3],
    [-1.9452005169610048e-3, -3.9590659703587967e-3, -7.7727242996177155e-3, -1.2978556297161696e-2, -1.9014501003127514e-2, -2.5218029951309143e-2, -3.0889870150948289e-2, -3.5361429299482926e-2, -3.8059523861408915e-2, -3.8562264536316728e-2, -3.6640791404117636e-2, -3.2282899099728135e-2, -2.5696361141300823e-2, -1.7292174284832690e-2, -7.6599415166613210e-3],
    [-1.7001230829367258e-3, -3.3754187760707522e-3, -6.5691417015674335e-3, -1.0980813193163734e-2, -1.6191752239187308e-2, -2.1700508243780387e-2, -2.6965355395781233e-2, -3.1450294276355117e-2, -3.4670712171327707e-2, -3.6234880948403912e-2, -3.5877818286314070e-2, -3.3484676556934882e-2, -2.9101705514392664e-2, -2.2933920020103321e-2, -1.5330145136012663e-2, -6.7660677910014243e-3],
    [-1.4984074950259090e-3, -2.9067246676076157e-3, -5.6063199913378227e-3, -9.3719000074020767e-3, -1.3886833612390829e-2, -1.8766944700796128e-2, -2.3589413509197682e-2, -2.7924639812563029e-2, -3.1368700683786293e-2, -3.3573990726416986e-2, -3.4275766919362791e-2, -3.3312623741992760e-2, -3.0639375470369250e-2, -2.6331392475133137e-2, -2.0580114466852975e-2, -1.3680500642828962e-2, -6.0196844102690867e-3],
    [-1.3304316837717017e-3, -2.5254539216072331e-3, -4.8267625926033710e-3, -8.0628400015048996e-3, -1.1990899100116491e-2, -1.6313190281052338e-2, -2.0697019672680062e-2, -2.4797149597584038e-2, -2.8279093434533592e-2, -3.0841757376119491e-2, -3.2237924483929566e-2, -3.2291219224453237e-2, -3.0908424053730400e-2, -2.8086328935576100e-2, -2.3912663421741687e-2, -1.8561091188511475e-2, -1.2280982655562223e-2, -5.3901017082554285e-3],
    [-1.1890941070327255e-3, -2.2116988826134502e-3, -4.1886553631745564e-3, -6.9875756372839480e-3, -1.0419927528137742e-2, -1.4252420410437240e-2, -1.8221106397652640e-2, -2.2047354808442857e-2, -2.5454745823222516e-2, -2.8185874148949004e-2, -3.0018058614902165e-2, -3.0777018638139110e-2, -3.0347699599460186e-2, -2.8681599315174506e-2, -2.5800157550483595e-2, -2.1794010982877157e-2, -1.6818196700600895e-2, -1.1083936470966001e-2, -4.8542023537830383e-3],
    [-1.0690629147509234e-3, -1.9508097838309760e-3, -3.6611187853273586e-3, -6.0965216267657955e-3, -9.1089122140064591e-3, -1.2513632207604274e-2, -1.6099559879687414e-2, -1.9640657574944315e-2, -2.2908354254861272e-2, -2.5684094401597248e-2, -2.7771375416823764e-2, -2.9006623070525433e-2, -2.9268317072483999e-2, -2.8483873130656212e-2, -2.6633909001728260e-2, -2.3753664147307559e-2, -1.9931501267395594e-2, -1.5304606185569620e-2, -1.0052431646823435e-2, -4.3943087506434211e-3],
    [-9.6627314278892425e-4, -1.7318347083541976e-3, -3.2210239526491015e-3, -5.3520511073680777e-3, -8.0073246286096481e-3, -1.1039282585195928e-2, -1.4277715337011516e-2, -1.7538220345659666e-2, -2.0631374387745500e-2, -2.3372173185105093e-2, -2.5589275254414505e-2, -2.7133596260340122e-2, -2.7885831872629168e-2, -2.7762539538660241e-2, -2.6720480163454536e-2, -2.4759006126101474e-2, -2.1920378758193572e-2, -1.8288004573812424e-2, -1.3982709537162181e-2, -9.1575193277493757e-3, -3.9967185403280812e-3],
    [-8.7758269425313209e-4, -1.5464683528524546e-3, -2.8508202714467740e-3, -4.7253106993737962e-3, -7.0756580127189353e-3, -9.7828924188553780e-3, -1.2708741997005995e-2, -1.5701898033920711e-2, -1.8604879236247838e-2, -2.1261187557625936e-2, -2.3522435269239356e-2, -2.5255124114469416e-2, -2.6346772869184864e-2, -2.6711118691921380e-2, -2.6292159006198622e-2, -2.5066852499734977e-2, -2.3046357966386774e-2, -2.0275756003799422e-2, -1.6832270733800399e-2, -1.2822101353378577e-2, -8.3762659163262394e-3, -3.6506796345923556e-3],
    [-8.0053237561891211e-4, -1.3883300247785086e-3, -2.5370292953011360e-3, -4.1939521779308736e-3, -6.2828211065206491e-3, -8.7069202945531730e-3, -1.1353106382478751e-2, -1.4096503966598998e-2, -1.6805693484973473e-2, -1.9348178723997808e-2, -2.1595909708747424e-2, -2.3430634422247838e-2, -2.4748859759267428e-2, -2.5466218075784460e-2, -2.5521059996814339e-2, -2.4877125808989646e-2, -2.3525185527977710e-2, -2.1483580167976053e-2, -1.8797642603314674e-2, -1.5538026278976967e-2, -1.1798038198100506e-2, -7.6903245153657744e-3, -3.3476604370182329e-3],
    [-7.3317556916507527e-4, -1.2524590747887223e-3, -2.2691845462950137e-3, -3.7405007205857577e-3, -5.6041788910352088e-3, -7.7809841253016750e-3, -1.0177696039521220e-2, -1.2690665256319447e-2, -1.5209771470394179e-2, -1.7622633889750192e-2, -1.9818915283735727e-2, -2.1694557310112852e-2, -2.3155787346856937e-2, -2.4122745624809845e-2, -2.4532595723585893e-2, -2.4342000921887334e-2, -2.3528872763375517e-2, -2.2093325643166401e-2, -2.0057801314458116e-2, -1.7466359276473198e-2, -1.4383164083589122e-2, -1.0890252413042244e-2, -7.0848839825290219e-3, -3.0808220625546362e-3],
    [-6.7395540337246788e-4, -1.1349566358644543e-3, -2.0390746801447687e-3, -3.3511690623813807e-3, -5.0200781398304030e-3, -6.9804175588084783e-3, -9.1548797431910183e-3, -1.1456954442290054e-2, -1.3793975716853965e-2, -1.6070389378533476e-2, -1.8191127216247033e-2, -2.0064970609393469e-2, -2.1607786472664379e-2, -2.2745522888648221e-2, -2.3416860109892887e-2, -2.3575424563802900e-2, -2.3191488659954042e-2, -2.2253097062672412e-2, -2.0766580060411254e-2, -1.8756436145074563e-2, -1.6264588577291959e-2, -1.3349045851497946e-2, -1.0082036571136040e-2, -6.5478866197224102e-3, -2.8446311636533513e-3],
    [-6.2161488689990483e-4, -1.0327275086083385e-3, -1.8401960580889394e-3, -3.0149869640499871e-3, -4.5147339695371388e-3, -6.2851163121741833e-3, -8.2616265380855103e-3, -1.0371671052150202e-2, -1.2536935793770810e-2, -1.4675940887304665e-2, -1.6706702024265049e-2, -1.8549412886245953e-2, -2.0129062224194316e-2, -2.1377901293589996e-2, -2.2237682139585284e-2, -2.2661594577637559e-2, -2.2615839388568828e-2, -2.2080786934452166e-2, -2.1051683736156293e-2, -1.9538884132735746e-2, -1.7567599591891559e-2, -1.5177174446041301e-2, -1.2419915194091842e-2, -9.3595332664645373e-3, -6.0694393571820813e-3, -2.6345721695611436e-3],
    [-5.7513028408902318e-4, -9.4329168430796884e-4, -1.6673519036875176e-3, -2.7231558362285970e-3, -4.0753849099907986e-3, -5.6786233722776927e-3, -7.4787299505662742e-3, -9.4144739152637354e-3, -1.1419386669380317e-2, -1.3423773547435855e-2, -1.5356825713614352e-2, -1.7148769050359264e-2, -1.8732985812784094e-2, -2.0048045624828675e-2, -2.1039585086268936e-2, -2.1661979765378691e-2, -2.1879758536315161e-2, -2.1668717899778189e-2, -2.1016702873908636e-2, -1.9924031000705780e-2, -1.8403546708975269e-2, -1.6480304475441669e-2, -1.4190890952391386e-2, -1.1582409919015752e-2, -8.7111810553797072e-3, -5.6413659566756036e-3, -2.4469308282843897e-3],
    [-5.3366111684094714e-4, -8.6464500025246356e-4, -1.5163554162466518e-3, -2.4685657231938682e-3, -3.6916481016212623e-3, -5.1474059282214533e-3, -6.7901472727191044e-3, -8.5679696755271179e-3, -1.0424220488828343e-2, -1.2299092180139715e-2, -1.4131308241160879e-2, -1.5859852820091819e-2, -1.7425695972749667e-2, -1.8773466540719552e-2, -1.9853026110371078e-2, -2.0620900244837930e-2, -2.1041527136180303e-2, -2.1088288887562653e-2, -2.0744296665855218e-2, -2.0002907798798689e-2, -1.8867960345377300e-2, -1.7353718559221980e-2, -1.5484530854094967e-2, -1.3294210470928622e-2, -1.0825159460360189e-2, -8.1272796169722724e-3, -5.2568631355084623e-3, -2.2786295689508269e-3],
    [-4.9651222051138091e-4, -7.9515492910924583e-4, -1.3838075161188327e-3, -2.2454304965243264e-3, -3.3550242159053602e-3, -4.6802840672847695e-3, -6.1824474473191236e-3, -7.8173104864695120e-3, -9.5363881834857389e-3, -1.1288187853302171e-2, -1.3019562855678271e-2, -1.4677111485834683e-2, -1.6208584731990054e-2, -1.7564266368590394e-2, -1.8698289564294305e-2, -1.9569855822093414e-2, -2.0144324592970581e-2, -2.0394145249041540e-2, -2.0299607180963410e-2, -1.9849388492826435e-2, -1.9040888986250283e-2, -1.7880338725651897e-2, -1.6382679334875806e-2, -1.4571221214845644e-2, -1.2477086244340073e-2, -1.0138453615874509e-2, -7.5996463863333526e-3, -4.9102340771396445e-3, -2.1271009877085772e-3],
    [-4.6310464738128131e-4, -7.3348180776671224e-4, -1.2669287870492599e-3, -2.0490099239445146e-3, -3.0585149395456823e-3, -4.2679787427113619e-3, -5.6443547331045978e-3, -7.1498252733619401e-3, -8.7427296744303142e-3, -1.0378587186787830e-2, -1.2011190184133108e-2, -1.3593741021053611e-2, -1.5080004983478243e-2, -1.6425451356138846e-2, -1.7588354914387683e-2, -1.8530831101716622e-2, -1.9219779756140721e-2, -1.9627714459533418e-2, -1.9733457350653339e-2, -1.9522682498344823e-2, -1.8988294598248754e-2, -1.8130633747778603e-2, -1.6957501279801656e-2, -1.5484006012953288e-2, -1.3732234769856469e-2, -1.1730755802916936e-2, -9.5139701834677918e-3, -7.1213437578314282e-3, -4.5966801393834151e-3, -1.9901896994310832e-3],
    [-4.3295313883927796e-4, -6.7851870107199453e-4, -1.1634312017740313e-3, -1.8753961641719410e-3, -2.7963255554749197e-3, -3.9027531947284874e-3, -5.1663738309140813e-3, -6.5546936397432125e-3, -8.0317773547678740e-3, -9.5590750512080278e-3, -1.1096309789162002e-2, -1.2602405937747241e-2, -1.4036437074665549e-2, -1.5358571907751601e-2, -1.6530996706426423e-2, -1.7518793260717382e-2, -1.8290752391624652e-2, -1.8820104496316398e-2, -1.9085150491865859e-2, -1.9069778779481355e-2, -1.8763856436510597e-2, -1.8163485698059841e-2, -1.7271119851178814e-2, -1.6095535868708111e-2, -1.4651664402953265e-2, -1.2960281132221278e-2, -1.1047567099186447e-2, -8.9445508736011692e-3, -6.6864610473804765e-3, -4.3121367372060494e-3, -1.8660755178749768e-3],
    [-4.0564852643031538e-4, -6.2934506445984712e-4, -1.0714193472141982e-3, -1.7213484560591583e-3, -2.5636322359327041e-3, -3.5781275632376683e-3, -4.7404828591154148e-3, -6.0226635748787511e-3, -7.3935574344426884e-3, -8.8196465157206577e-3, -1.0265731825452510e-2, -1.1695694900231256e-2, -1.3073280174512744e-2, -1.4362881411014196e-2, -1.5530315399635040e-2, -1.6543566399780228e-2, -1.7373485422018417e-2, -1.7994429405149569e-2, -1.8384826623560928e-2, -1.8527656230029719e-2, -1.8410831667558853e-2, -1.8027479731755202e-2, -1.7376109289792520e-2, -1.6460666017708663e-2, -1.5290471960051901e-2, -1.3880051210120924e-2, -1.2248845563666056e-2, -1.0420826812763071e-2, -8.4240166340509315e-3, -6.2899391959240621e-3, -4.0531430504850413e-3, -1.7532128305800972e-3],
]

LARGEX_RT = [
    [5.0000000000000000e-1],
    [2.7525512860841095e-1, 2.7247448713915890e+0],
    [1.9016350919348813e-1, 1.7844927485432516e+0, 5.5253437422632603e+0],
    [1.4530352150331709e-1, 1.3390972881263614e+0, 3.9269635013582872e+0, 8.5886356890120343e+0],
    [1.1758132021177814e-1, 1.0745620124369040e+0, 3.0859374437175500e+0, 6.4147297336620305e+0, 11.807189489971737e+0],
    [9.8747014068481182e-2, 8.9830283456961770e-1, 2.5525898026681713e+0, 5.1961525300544656e+0, 9.1242480375311789e+0, 15.129959781108085e+0],
    [8.5115442997594034e-2, 7.7213792004277699e-1, 2.1805918884504589e+0, 4.3897928867310141e+0, 7.5540913261017844e+0, 11.989993039823879e+0, 18.528277495852492e+0],
    [7.4791882596818270e-2, 6.7724908764928915e-1, 1.9051136350314284e+0, 3.8094763614849071e+0, 6.4831454286271704e+0, 10.093323675221343e+0, 14.972627088426393e+0, 21.984272840962651e+0],
    [6.6702230958194404e-2, 6.0323635708174870e-1, 1.6923950797931789e+0, 3.3691762702432690e+0, 5.6944233429577552e+0, 8.7697567302686021e+0, 12.771825354869194e+0, 18.046505467728980e+0, 25.485979166099077e+0],
    [6.0192063149587915e-2, 5.4386750029464601e-1, 1.5229441054044437e+0, 3.0225133764515740e+0, 5.0849077500985240e+0, 7.7774392315254451e+0, 11.208130204348663e+0, 15.561163332189350e+0, 21.193892096301541e+0, 29.024950340236226e+0],
    [5.4839869578818493e-2, 4.9517412335035644e-1, 1.3846557400845999e+0, 2.7419199401067025e+0, 4.5977377004857113e+0, 6.9993974695288362e+0, 10.018908275957234e+0, 13.769305866101691e+0, 18.441119680978192e+0, 24.401961242387043e+0, 32.594980091440815e+0],
    [5.0361889117293951e-2, 4.5450668156378028e-1, 1.2695899401039615e+0, 2.5098480972321280e+0, 4.1984156448784132e+0, 6.3699753880306349e+0, 9.0754342309612030e+0, 12.390447963809471e+0, 16.432195087675313e+0, 21.396755936166109e+0, 27.661108779846090e+0, 36.191360360615602e+0],
    [4.6560083245024772e-2, 4.2002740640121356e-1, 1.1723107732777799e+0, 2.3145408643494344e+0, 3.8645850382281590e+0, 5.8487348113063431e+0, 8.3045534899859004e+0, 11.285750993517638e+0, 14.870960377525401e+0, 19.180919485610456e+0, 24.416692333056517e+0, 30.963938274746795e+0, 39.810426068749338e+0],
    [4.3292035739773549e-2, 3.9042092604203151e-1, 1.0889658675692704e+0, 2.1477994705822316e+0, 3.5810282499917713e+0, 5.4091123306164602e+0, 7.6606911156100850e+0, 10.375563009770052e+0, 13.609711429390236e+0, 17.444294475704189e+0, 22.003196766914923e+0, 27.492041504843852e+0, 34.304620509373083e+0, 43.449262307852043e+0],
    [4.0452704304575257e-2, 3.6472064505140779e-1, 1.0167460688574956e+0, 2.0037189531339227e+0, 3.3369832057345100e+0, 5.0328052776251156e+0, 7.1135937697298751e+0, 9.6098172843044441e+0, 12.563082369948498e+0, 16.031284108073975e+0, 20.097785334755927e+0, 24.889312475156550e+0, 30.615717400899492e+0, 37.678471784205299e+0, 47.105508618218914e+0],
    [3.7962914575313455e-2, 3.4220015601094768e-1, 9.5355315539086550e-1, 1.8779315076960743e+0, 3.1246010507021443e+0, 4.7067267076675872e+0, 6.6422151797414440e+0, 8.9550013377233902e+0, 11.677033673975957e+0, 14.851431341801250e+0, 18.537743178606694e+0, 22.821300693525208e+0, 27.831438211328676e+0, 33.781970488226166e+0, 41.081666525491202e+0, 50.777223877537080e+0],
    [3.5761858556337384e-2, 3.2230289701540760e-1, 8.9778743824424954e-1, 1.7671330095048280e+0, 2.9380104369247211e+0, 4.4212366485835118e+0, 6.2313736025080120e+0, 8.3876207781715139e+0, 10.915150152476127e+0, 13.847145110793951e+0, 17.228024947684798e+0, 21.118801755252181e+0, 25.606595795917326e+0, 30.823164238528482e+0, 36.986065260934996e+0, 44.511035627908565e+0, 54.462790440994993e+0],
    [3.3802060596144768e-2, 3.0459519206802303e-1, 8.4820747882451005e-1, 1.6687755533298348e+0, 2.7727245286391228e+0, 4.1690582475017763e+0, 5.8697952945278803e+0, 7.8906059174609412e+0, 10.251740616401369e+0, 12.979403028335361e+0, 16.107833621211359e+0, 19.682594096569806e+0, 23.766014733151866e+0, 28.446863416187917e+0, 33.859169865578398e+0, 40.224050469543095e+0, 47.963921373889529e+0, 58.160844506183066e+0],
    [3.2045913128252993e-2, 2.8873407234686432e-1, 8.0383479939549502e-1, 1.5808614575096896e+0, 2.6252513972914890e+0, 3.9445843839317145e+0, 5.5489066368145513e+0, 7.4511963747374166e+0, 9.6680282675023466e+0, 12.220529929386148e+0, 15.135786084744241e+0, 18.448961406463173e+0, 22.206639606535554e+0, 26.472355727146923e+0, 31.336411796150888e+0, 36.934985280054456e+0, 43.492591618441627e+0, 51.438070769382129e+0, 61.870224479037043e+0],
    [3.0463239279482525e-2, 2.7444471579285032e-1, 7.6388755844391323e-1, 1.5018014976681045e+0, 2.4928301451213655e+0, 3.7434180412162938e+0, 5.2620558537883516e+0, 7.0596277357415607e+0, 9.1498983120306480e+0, 11.550198286442804e+0, 14.282403685210402e+0, 17.374366975199078e+0, 20.862075185437844e+0, 24.793039892463459e+0, 29.231910157093426e+0, 34.270428925039573e+0, 40.046815790245603e+0, 46.788846392124963e+0, 54.931555621020550e+0, 65.589931990639727e+0],
    [2.9029543936387634e-2, 2.6150430708215295e-1, 7.2773338834365034e-1, 1.4303150459330357e+0, 2.3732474728319006e+0, 3.5620583926357074e+0, 5.0039935628186741e+0, 6.7082806310126750e+0, 8.6864934825800207e+0, 10.953055650413523e+0, 13.525943011373356e+0, 16.427682387916022e+0, 19.686806658322944e+0, 23.340045388239311e+0, 27.435762818520231e+0, 32.039647947988587e+0, 37.244806615266049e+0, 43.191409701011829e+0, 50.110370364086812e+0, 58.442711638286255e+0, 69.319101991400876e+0],
    [2.7724736591276774e-2, 2.4973028108823534e-1, 6.9485521795227386e-1, 1.3653582776868291e+0, 2.2647072589375218e+0, 3.3976808657520632e+0, 4.7705156762734962e+0, 6.3911097478094521e+0, 8.2693001309060626e+0, 10.417240214581929e+0, 12.849916314252928e+0, 15.585864757495914e+0, 18.648187517474805e+0, 22.066029202676830e+0, 25.876798119301598e+0, 30.129649964964480e+0, 34.891252115132359e+0, 40.256006929107099e+0, 46.365957352938528e+0, 53.455044504540614e+0, 61.970091334807096e+0, 73.056979479728608e+0],
    [2.6532183876098378e-2, 2.3897161999933407e-1, 6.6482608325629018e-1, 1.3060716158039979e+0, 2.1657359795353485e+0, 3.2479796092961243e+0, 4.5582116475947763e+0, 6.1032492614598550e+0, 7.8915323621309737e+0, 9.9334115718826270e+0, 12.241535951273148e+0, 14.831380588625730e+0, 17.721976213997484e+0, 20.936940207605188e+0, 24.505973901846376e+0, 28.467112454527676e+0, 32.870252361043638e+0, 37.782987405363054e+0, 43.300959201161332e+0, 49.568012842125616e+0, 56.821018665012516e+0, 65.512427112270117e+0, 76.802901160312700e+0],
    [2.5437996585689359e-2, 2.2910231649262433e-1, 6.3729027873266879e-1, 1.2517406323627464e+0, 2.0751129098523806e+0, 3.1110524551477130e+0, 4.3642830769353062e+0, 5.8407332713236080e+0, 7.5477046800234544e+0, 9.4940953300264876e+0, 11.690695926056073e+0, 14.150586187285759e+0, 16.889671928527108e+0, 19.927425875242462e+0, 23.287932824879917e+0, 27.001406056472356e+0, 31.106464709046565e+0, 35.653703516328212e+0, 40.711598185543107e+0, 46.376979557540133e+0, 52.795432527283630e+0, 60.206666963057223e+0, 69.068601975304369e+0, 80.556280819950406e+0],
    [2.4430486164134554e-2, 2.2001639865187669e-1, 6.1194905886035602e-1, 1.2017665377409915e+0, 1.9918178052911782e+0, 2.9853154656388090e+0, 4.1864105010442783e+0, 5.6002933990827335e+0, 7.2333279637322214e+0, 9.0932267983089195e+0, 11.189281321712449e+0, 13.532664930275970e+0, 16.136836705389790e+0, 19.018086906205196e+0, 22.196288008884540e+0, 25.695953089717142e+0, 29.547770386068312e+0, 33.790907096465992e+0, 38.476619956375995e+0, 43.674228042342542e+0, 49.481707240111522e+0, 56.046326151559530e+0, 63.610552160222086e+0, 72.637626045451731e+0, 84.316597544701703e+0],
    [2.3499745451748165e-2, 2.1162409772850769e-1, 5.8854965565640838e-1, 1.1556436128826397e+0, 1.9149911321201441e+0, 2.8694384848332136e+0, 4.0226539114050963e+0, 5.3792094651444282e+0, 6.9446884907059310e+0, 8.7258252848297221e+0, 10.730686164960116e+0, 12.968905056512702e+0, 15.451992498719476e+0, 18.193745832982034e+0, 21.210802311794053e+0, 24.523399621789364e+0, 28.156446757738671e+0, 32.141075953841755e+0, 36.516971983705095e+0, 41.336022358465096e+0, 46.668355740523515e+0, 52.613053664164717e+0, 59.319017574105791e+0, 67.031396926394290e+0, 76.218617538242383e+0, 88.083386135303103e+0],
    [2.2637321764490403e-2, 2.0384886358910114e-1, 5.6687674698997588e-1, 1.1129417449108705e+0, 1.8439034531225938e+0, 2.7622958634819484e+0, 3.8713773423959184e+0, 5.1751974796436675e+0, 6.6786842873405901e+0, 8.3877565918984588e+0, 10.309468348865641e+0, 12.452194292401610e+0, 14.825870237972619e+0, 17.442307191222059e+0, 20.315607360293737e+0, 23.462724279507747e+0, 26.904232239340534e+0, 30.665409061778991e+0, 34.777804747837430e+0, 39.281595476659632e+0, 44.229272334197169e+0, 49.691743673383555e+0, 55.769161249665578e+0, 62.612012913671615e+0, 70.468060440696952e+0, 79.810787215031665e+0, 91.856229242335852e+0],
    [2.1835959421664288e-2, 1.9662501675605397e-1, 5.4674575955457735e-1, 1.0732927646925488e+0, 1.7779315886935153e+0, 2.6629283184247891e+0, 3.7311909350139650e+0, 4.9863243745575852e+0, 6.4327019219178298e+0, 8.0755565686670168e+0, 9.9210973194213098e+0, 11.976657318097082e+0, 14.250883359461472e+0, 16.753980285337464e+0, 19.498029648036460e+0, 22.497411050074690e+0, 25.769368816152562e+0, 29.334789869091170e+0, 33.219297919270076e+0, 37.454838268460073e+0, 42.082055800206736e+0, 47.154021248777765e+0, 52.742395970002203e+0, 58.948369842919361e+0, 65.923974474211669e+0, 73.919519173353013e+0, 83.413425568839062e+0, 95.634750860588287e+0],
    [2.1089395098205158e-2, 1.8989588398975637e-1, 5.2799756150380653e-1, 1.0363796519133511e+0, 1.7165398584196182e+0, 2.5705130786025097e+0, 3.6009058856172511e+0, 4.8109422295121215e+0, 6.2045223787503813e+0, 7.7862978584545159e+0, 9.5617661276720232e+0, 11.537390089408222e+0, 13.720749420799105e+0, 16.120733421037701e+0, 18.747789038878785e+0, 21.614243675418421e+0, 24.734731466985336e+0, 28.126766135082082e+0, 31.811526931229533e+0, 35.814963828855455e+0, 40.169397995140625e+0, 44.915923137908340e+0, 50.108168407561148e+0, 55.818524151111106e+0, 62.149189096788941e+0, 69.253699227995114e+0, 77.384850976179515e+0, 87.025892182318491e+0, 99.418610907768539e+0],
    [2.0392193775236528e-2, 1.8361230503708193e-1, 5.1049421913596570e-1, 1.0019279274528395e+0, 1.6592651780060929e+0, 2.4843402777905515e+0, 3.4794990281427914e+0, 4.6476369270260962e+0, 5.9922482023656097e+0, 7.5174877929290097e+0, 9.2282491217658842e+0, 11.130261490352576e+0, 13.230212276078705e+0, 15.535901019228723e+0, 18.056435214799700e+0, 20.802481620579336e+0, 23.786592878196364e+0, 27.023638435386893e+0, 30.531383273363225e+0, 34.331281605561590e+0, 38.449592717510597e+0, 42.918996674025957e+0, 47.781018446551956e+0, 53.089826610037136e+0, 58.918518746195040e+0, 65.370275574797104e+0, 72.600100925448836e+0, 80.863221815671643e+0, 90.647606826965724e+0, 103.20750067582174e+0],
    [1.9739616193178225e-2, 1.7773142707141705e-1, 4.9411557648940697e-1, 9.6969873164499710e-1, 1.6057051140985357e+0, 2.4037941117242699e+0, 3.3660847103142892e+0, 4.4951876368162760e+0, 5.7942464369889660e+0, 7.2669891295593968e+0, 8.9177926244746360e+0, 10.751762818395917e+0, 12.774834264847245e+0, 14.993894676815958e+0, 17.416941435106201e+0, 20.053280025321787e+0, 22.913778355123558e+0, 26.011196940249090e+0, 29.360624220999087e+0, 32.980060918172181e+0, 36.891221217477798e+0, 41.120658946990167e+0, 45.701398131155182e+0, 50.675379370668549e+0, 56.097293554984451e+0, 62.040925662658720e+0, 68.610413634453705e+0, 75.962195116562380e+0, 84.353874634793745e+0, 94.278041969742886e+0, 107.00113899010602e+0],
    [1.9127510968446856e-2, 1.7221572414539558e-1, 4.7875647727748885e-1, 9.3948321450073428e-1, 1.5555082314789380e+0, 2.3283376682103970e+0, 3.2598922564569419e+0, 4.3525345293301410e+0, 5.6091034574961513e+0, 7.0329577982838936e+0, 8.6280298574059291e+0, 10.398891905552624e+0, 12.350838217714770e+0, 14.489986690780274e+0, 16.823405362953694e+0, 19.359271087268714e+0, 22.107070382206007e+0, 25.077856544198053e+0, 28.284583194970531e+0, 31.742543790616606e+0, 35.469961396173283e+0, 39.488797123368127e+0, 43.825886369903902e+0, 48.514583867416048e+0, 53.597231826148512e+0, 59.129027934391951e+0, 65.184426376135782e+0, 71.868499359551422e+0, 79.339086528823201e+0, 87.856119943133525e+0, 97.916716426062762e+0, 110.79926894707576e+0],
]

LARGEX_WW = [
    [1.0000000000000000e+0],
    [9.0824829046386302e-1, 9.1751709536136984e-2],
    [8.1765693911205845e-1, 1.7723149208382905e-1, 5.1115688041124929e-3],
    [7.4602451535815470e-1, 2.3447981532351803e-1, 1.9270440241576534e-2, 2.2522907675073554e-4],
    [6.8928466986403809e-1, 2.7096740596053547e-1, 3.8223161001540571e-2, 1.5161418686244353e-3, 8.6213052614365735e-6],
    [6.4332872302565998e-1, 2.9393409609065998e-1, 5.8233375824728302e-2, 4.4067613750663977e-3, 9.6743698451812556e-5, 2.9998543352743357e-7],
    [6.0526925362603900e-1, 3.0816667968502725e-1, 7.7300217648506800e-2, 8.8578382138948070e-3, 4.0067910752148828e-4, 5.3219826881352611e-6, 9.7363225154967616e-9],
    [5.7313704247602425e-1, 3.1667674550189924e-1, 9.4569504708028058e-2, 1.4533875202369467e-2, 1.0519698531478185e-3, 3.0600064324974544e-5, 2.6189464325736455e-7, 2.9956294463236795e-10],
    [5.4556646930857575e-1, 3.2137060778702527e-1, 1.0979326496044526e-1, 2.1033035503882684e-2, 2.1309695925833040e-3, 1.0359792288232412e-4, 2.0431047952739625e-6, 1.1810976957673192e-8, 8.8331775387174105e-12],
    [5.2158612689910972e-1, 3.2347866796799992e-1, 1.2301274412795381e-1, 2.7995674894202007e-2, 3.6602062621609856e-3, 2.5765255992385890e-4, 8.8042421804617057e-6, 1.2254980519965895e-7, 4.9641247246303573e-10, 2.5156013448758540e-13],
    [5.0048719317386990e-1, 3.2381258682735054e-1, 1.3439262285778005e-1, 3.5138145761611532e-2, 5.6175220951544315e-3, 5.2456660651192753e-4, 2.6691954253619029e-5, 6.6397074996280721e-7, 6.7330283189164222e-9, 1.9682757964692172e-11, 6.9589212957542917e-15],
    [4.8174023109328065e-1, 3.2291902573400017e-1, 1.4413872803435666e-1, 4.2252688817935093e-2, 7.9532178583626173e-3, 9.2943743755879140e-4, 6.4190011305491825e-5, 2.4353194908851626e-6, 4.5349233469612840e-8, 3.4373298559297160e-10, 7.4299483055247971e-13, 1.8780387378083912e-16],
    [4.6494147126015531e-1, 3.2117309122758917e-1, 1.5245906441260605e-1, 4.9195331314242362e-2, 1.0604396031364489e-2, 1.4884051527208677e-3, 1.3115117388667681e-4, 6.8868272246162537e-6, 1.9973511146629173e-7, 2.8485864759760186e-9, 1.6485618886327706e-11, 2.6890952993271460e-14, 4.9613885207872616e-18],
    [4.4977725950135310e-1, 3.1883638732261831e-1, 1.5954673202319922e-1, 5.5871569535761779e-2, 1.3504919418060288e-2, 2.2086118557151972e-3, 2.3765707628035696e-4, 1.6187168114290305e-5, 6.6097288998530190e-7, 1.4958725169227278e-8, 1.6653219687764516e-10, 7.4918020703531324e-13, 9.3835311390007260e-16, 1.2865094877603709e-19],
    [4.3599994363115451e-1, 3.1609390641804143e-1, 1.6557367343124369e-1, 6.2223540367002554e-2, 1.6591495115446590e-2, 3.0894146797321704e-3, 3.9302588796965281e-4, 3.3159963261346903e-5, 1.7818177737242389e-6, 5.7643503080952889e-8, 1.0356918934379420e-9, 9.1468517426524067e-12, 3.2481602599447940e-14, 3.1711218899325958e-17, 3.2816140162356827e-21],
    [4.2341113976095864e-1, 3.1307798751519689e-1, 1.7068961654416152e-1, 6.8219695452184101e-2, 1.9806923404641184e-2, 4.1241021026157694e-3, 6.0511405163412498e-4, 6.1119606121792603e-5, 4.1192442079068578e-6, 1.7762581426211790e-7, 4.6250368241484811e-9, 6.6950024796024140e-11, 4.7561297115556174e-13, 1.3510580447340237e-15, 1.0416899183921723e-18, 8.2492149780365387e-23],
    [4.1184987333822709e-1, 3.0988419302971962e-1, 1.7502336271724779e-1, 7.3846925916088518e-2, 2.3101477893554248e-2, 5.3016484766203907e-3, 8.7992993354924756e-4, 1.0365425286733818e-4, 8.4554514967754888e-6, 4.6240685286457707e-7, 1.6234818080244530e-8, 3.4486111334905769e-10, 4.0733153595416138e-12, 2.3558755812450366e-14, 5.4161094185246470e-17, 3.3362887511570733e-20, 2.0466542596109163e-24],
    [4.0118401287804420e-1, 3.0658202679942274e-1, 1.7868499500877332e-1, 7.9104739533119443e-2, 2.6433148031204250e-2, 6.6082690768705903e-3, 1.2215096671021977e-3, 1.6440051124820763e-4, 1.5793956173446348e-5, 1.0556630385602032e-6, 4.7476455547314096e-8, 1.3742166774424459e-9, 2.4094891730959754e-11, 2.3480585102103187e-13, 1.1174227957300120e-15, 2.1005883869494760e-18, 1.0444732401725871e-21, 5.0180752692698953e-26],
    [3.9130397408272692e-1, 3.0322229252021567e-1, 1.8176831110517648e-1, 8.4001039948325432e-2, 2.9767244441382213e-2, 8.0286850035604119e-3, 1.6319828251932272e-3, 2.4684151322487875e-4, 2.7333196978369717e-5, 2.1703986095318891e-6, 1.2035140659893825e-7, 4.5029695793209627e-9, 1.0862939294794204e-10, 1.5883441401039689e-12, 1.2895813049708617e-14, 5.0973075787523839e-17, 7.9075044204715016e-20, 3.2031736699482301e-23, 1.2172039136849714e-27],
    [3.8211801932398096e-1, 2.9984222352714132e-1, 1.8435315834012162e-1, 8.8549110404553633e-2, 3.3075688285138806e-2, 9.5470897636467218e-3, 2.1117580338036304e-3, 3.5414585759848032e-4, 4.4423542864951674e-5, 4.0977948721629215e-6, 2.7206848431497515e-7, 1.2651794377097727e-8, 3.9782370520555254e-10, 8.0752771633903723e-12, 9.9361770583955667e-14, 6.7797068864966499e-16, 2.2445504136542278e-18, 2.8972188631031839e-21, 9.6409358804016249e-25, 2.9236797477388334e-29],
    [3.7354869772403906e-1, 2.9646910879859129e-1, 1.8650753720919129e-1, 9.2765483582315503e-2, 3.6336180231103149e-2, 1.1147849122436932e-2, 2.6597718111442862e-3, 4.8905337817380369e-4, 6.8514755458217145e-5, 7.2106204226087587e-6, 5.6008898522734316e-7, 3.1408112827615209e-8, 1.2364837913810999e-9, 3.2968179518363157e-11, 5.6788001330617531e-13, 5.9277568359646957e-15, 3.4256354220559637e-17, 9.5710836993052226e-20, 1.0356140658899053e-22, 2.8523956917266094e-26, 6.9596835174689166e-31],
    [3.6553011371946233e-1, 2.9312288834281842e-1, 1.8828943358993127e-1, 9.6668454590768456e-2, 3.9531361667655202e-2, 1.2815980436689404e-2, 3.2737594536686006e-3, 6.5380594526582218e-4, 1.0110048687004475e-4, 1.1961012995742854e-5, 1.0668304325616615e-6, 7.0441602788046544e-8, 3.3660916108090524e-9, 1.1313130408204489e-10, 2.5781296319278108e-12, 3.7970360820092870e-14, 3.3868542207148304e-16, 1.6693353963053631e-18, 3.9630311999855164e-21, 3.6189621414024280e-24, 8.3072697216188939e-28, 1.6430501786349222e-32],
    [3.5800580619470225e-1, 2.8981803207491412e-1, 1.8974838445154744e-1, 1.0027705660218360e-1, 4.2648028294714428e-2, 1.4537458961986797e-2, 3.9505207413261073e-3, 8.5011717981626624e-4, 1.4366505225061130e-4, 1.8873197643040381e-5, 1.9035156699551580e-6, 1.4516963726858873e-7, 8.2164449617053346e-9, 3.3722125814057579e-10, 9.7482259264857158e-12, 1.9122727690869886e-13, 2.4244888308603274e-15, 1.8600707015402171e-17, 7.8690901804095409e-20, 1.5972254521067974e-22, 1.2385719396147014e-25, 2.3844925442657879e-29, 3.8493292540923027e-34],
    [3.5092708362373218e-1, 2.8656491398635235e-1, 1.9092680112285854e-1, 1.0361036709912053e-1, 4.5676424200182681e-2, 1.6299393710703856e-2, 4.6861642235208031e-3, 1.0791731692543769e-3, 1.9763609835222677e-4, 2.8532184648493628e-5, 3.2127873910852267e-6, 2.7855833791199193e-7, 1.8308111492627641e-8, 8.9485743068727500e-10, 3.1767219624927135e-11, 7.9516119169429806e-13, 1.3513354549314233e-14, 1.4839987196129436e-16, 9.8509302193979143e-19, 3.5977098324746187e-21, 6.2789532895984157e-24, 4.1581179428373254e-27, 6.7529122862707464e-31, 8.9543109477517407e-36],
    [3.4425170398488637e-1, 2.8337082649988775e-1, 1.9186108071620299e-1, 1.0668704906340192e-1, 4.8609625728486130e-2, 1.8090108309699283e-2, 5.4763217938706822e-3, 1.3416561239574158e-3, 2.6434526573379761e-4, 4.1569703514690919e-5, 5.1698753178987690e-6, 5.0292197616776468e-7, 3.7764519536704560e-8, 2.1541215787780344e-9, 9.1532734246208986e-11, 2.8284578722532818e-12, 6.1676573740107627e-14, 9.1333964936011636e-16, 8.7363436324031303e-18, 5.0449656143360146e-20, 1.5990188955830167e-22, 2.4120891015221533e-25, 1.3712561517848867e-28, 1.8886829319168771e-32, 2.0692150011539964e-37],
    [3.3794281831211438e-1, 2.8024073546098434e-1, 1.9258253664230975e-1, 1.0952505818221495e-1, 5.1443013966369250e-2, 1.9899155012384466e-2, 6.3163306227402022e-3, 1.6377836829106235e-3, 3.4499769531939002e-4, 5.8648633425770043e-5, 7.9822676287387405e-6, 8.6158159056191466e-7, 7.2919305786010737e-8, 4.7737982856558617e-9, 2.3782159601959589e-10, 8.8381931671955865e-12, 2.3909835074532958e-13, 4.5669756896372286e-15, 5.9243423891952968e-17, 4.9611413029243300e-19, 2.5046563890060751e-21, 6.9230353804790649e-24, 9.0697778108407141e-27, 4.4476138376213145e-30, 5.2211960259687510e-34, 4.7522163234420853e-39],
    [3.3196811795916796e-1, 2.7717784627086352e-1, 1.9311817671143121e-1, 1.1214146659976469e-1, 5.4173829278283168e-2, 2.1717283483241988e-2, 7.2013828893609510e-3, 1.9673577634472729e-3, 4.4065031364698225e-4, 8.0447056193944702e-5, 1.1887976024248380e-5, 1.4102595988863506e-6, 1.3299289524291626e-7, 9.8546372097326657e-9, 5.6585279982455105e-10, 2.4761135152376546e-11, 8.0919962956343984e-13, 1.9265276469394001e-14, 3.2395644735553759e-16, 3.6991112272006688e-18, 2.7246881477213790e-20, 1.2080980930422960e-22, 2.9251392406309604e-25, 3.3429672492020109e-28, 1.4203821086453335e-31, 1.4277608134851951e-35, 1.0851136987196604e-40],
    [3.2629914080686934e-1, 2.7418403121591524e-1, 1.9349135384672128e-1, 1.1455236779916420e-1, 5.6800798959136669e-2, 2.3536380515071278e-2, 8.1266456989688567e-3, 2.3298181360809983e-3, 5.5219822553578699e-4, 1.0764284892273721e-4, 1.7152583673214981e-5, 2.2181151846596211e-6, 2.3080391657036210e-7, 1.9130906282643375e-8, 1.2482138218979067e-9, 6.3205006410821947e-11, 2.4420298304472759e-12, 7.0528726336758561e-14, 1.4847846385026618e-15, 2.2081547314362956e-17, 2.2293012712626883e-19, 1.4505724806862015e-21, 5.6724748192019088e-24, 1.2081232562612244e-26, 1.2093961010872282e-29, 4.4708121318609241e-33, 3.8646806884574509e-37, 2.4643207251964564e-42],
    [3.2091070260471901e-1, 2.7126015390759433e-1, 1.9372231080136831e-1, 1.1677283731866922e-1, 5.9323828445470900e-2, 2.5349392478457166e-2, 9.0873545403086370e-3, 2.7242971132887414e-3, 6.8036819444262661e-4, 1.4089949985735000e-4, 2.4065325529694293e-5, 3.3683591904564625e-6, 3.8347678623247260e-7, 3.5200066343932803e-8, 2.5784329171251308e-9, 1.4890103967540034e-10, 6.6820102338953571e-12, 2.2903165842743184e-13, 5.8723917058983839e-15, 1.0979718124159402e-16, 1.4502656885515039e-18, 1.2998534256895678e-20, 7.5014959155146295e-23, 2.5973065268494646e-25, 4.8845679074858357e-28, 4.2994974135956302e-31, 1.3882300680633443e-34, 1.0361288228040763e-38, 5.5680352918588281e-44],
    [3.1578042765949236e-1, 2.6840631685517311e-1, 1.9382863687099960e-1, 1.1881693127749455e-1, 6.1743746844779986e-2, 2.7150238923080395e-2, 1.0078883978552690e-2, 3.1496727855870827e-3, 8.2571803671125999e-4, 1.8085360541258893e-4, 3.2934475587777894e-5, 4.9584218331236952e-6, 6.1310664099141702e-7, 6.1785017606854070e-8, 5.0289859710017593e-9, 3.2715763079828754e-10, 1.6801084533762247e-11, 6.7120850712329023e-13, 2.0498413262850772e-14, 4.6855314259072086e-16, 7.8120487098049796e-18, 9.2003980457468937e-20, 7.3486452176672532e-22, 3.7752824470360481e-24, 1.1615602816842657e-26, 1.9358169994612707e-29, 1.5036325048276650e-32, 4.2558250249436302e-36, 2.7529603514345678e-40, 1.2520351346822821e-45],
    [3.1088835901770419e-1, 2.6562205119893826e-1, 1.9382565158599318e-1, 1.2069770990611951e-1, 6.4062098330091642e-2, 2.8933723190107208e-2, 1.1096799233588305e-2, 3.6046190917707753e-3, 9.8864073763996321e-4, 2.2810430848881909e-4, 4.4082312968263372e-5, 7.0996778628839259e-6, 9.4734617519597150e-7, 1.0402046551304456e-7, 9.3247728369681132e-9, 6.7620297828389656e-10, 3.9244392817292196e-11, 1.8000072378314521e-12, 6.4284832978960695e-14, 1.7562292529450303e-15, 3.5926337638018171e-17, 5.3612722742496845e-19, 5.6502164272837439e-21, 4.0359700176457077e-23, 1.8521346940051286e-25, 5.0810055281854110e-28, 7.5291225128713795e-31, 5.1779710958942424e-34, 1.2890636290348068e-37, 7.2526085391619564e-42, 2.8025709293189410e-47],
    [3.0621663272379356e-1, 2.6290646263500180e-1, 1.9372672779195055e-1, 1.2242727702135309e-1, 6.6280971923855951e-2, 3.0695443991155324e-2, 1.2136892031783013e-2, 4.0876516775697621e-3, 1.1693721661392031e-3, 2.8320477668272069e-4, 5.7839916488291372e-5, 9.9167594421264812e-6, 1.4198849243813263e-6, 1.6875282095081969e-7, 1.6532168842958615e-8, 1.3242846821901387e-9, 8.5928524979705040e-11, 4.4674537110515441e-12, 1.8373857574659326e-13, 5.8885862939954605e-15, 1.4444307147048827e-16, 2.6538177109370513e-18, 3.5569383822245629e-20, 3.3658002240859000e-22, 2.1571302207095376e-24, 8.8710888409415611e-27, 2.1767603082917179e-29, 2.8769842417171218e-32, 1.7573271358620929e-35, 3.8603408596595508e-39, 1.8953926380086060e-43, 6.2463759302154424e-49],
]

POLYFIT_X = [
    [
        [[1.4499881329356447e-2, 1.4229411451860063e-1, 4.7824921163582465e-1, 1.3196607332377823e+0, 4.0525291322555087e+0, 23.837708482863517e+0], [-1.3828320332137155e-3, -1.3706924555468690e-2, -4.6931755247356783e-2, -1.3262816717157596e-1, -4.1709665657440909e-1, -2.4950213346761472e+0], [4.9012349112891991e-5, 4.5727927326321126e-4, 1.3788134740555588e-3, 3.1856283165853470e-3, 7.6709984657359238e-3, 3.5534667023734881e-2], [-1.5244149994978740e-6, -1.1915190265894754e-5, -2.3473438866683130e-5, -2.1102123592111152e-5, 4.5835757780337966e-6, 3.8665822241555172e-5], [4.3623628135786088e-8, 2.3186817586215820e-7, 1.9683692336721255e-8, -6.8903021403758266e-7, -6.8126430807742716e-7, 6.7347440319026071e-7], [-1.1701363991032449e-9, -2.4066661369206223e-9, 1.0106603599816324e-8, 3.9615158387492480e-9, -2.6834876567079792e-8, 5.1570013306476261e-9], [2.9544479361333992e-11, -4.1492595017666138e-11, -1.7427635468388485e-10, 4.9531164234898818e-10, -3.7753965766435046e-10, -2.5389771965054663e-10], [-7.0077819269461399e-13, 2.9148408354993273e-12, -4.3415718337256831e-12, -5.8399620678226899e-14, 9.2816311469329790e-12, -1.6866398304233936e-11], [1.5394414896047860e-14, -7.7621845695517545e-14, 2.2143038207009614e-13, -4.3720797482385537e-13, 6.1260555975707056e-13, -6.5550892785211988e-13], [-3.0555747024152234e-16, 7.5564627662654645e-16, -5.1369951511608716e-16, -2.5690919557892674e-15, 1.0724674435950751e-14, -2.0078103800538008e-14], [5.0309561899686306e-18, 3.0588270654621572e-17, -1.9513359951294346e-16, 4.1550139224097606e-16, -2.5714875870208328e-16, -5.1928034167307557e-16], [-5.2707893058346740e-20, -1.8185202746272425e-18, 4.3798863924178959e-18, 4.8991308803821945e-18, -1.9369236527211565e-17, -1.0319136405441022e-17], [-5.5293827439704179e-22, 4.6947423155537442e-20, 1.0558359938696481e-19, -4.0705257125557316e-19, -3.3181461430436646e-19, 1.8122463656946779e-19], [7.3428857268961025e-23, -1.7756526383941180e-22, -6.1648623633978570e-21, -6.2935967414213026e-21, 1.4150791480756675e-20, 4.7157817007829895e-20]],
        [[1.2075731181224659e-2, 1.1812768071436555e-1, 3.9453710286150779e-1, 1.0789617927794170e+0, 3.2797186480898673e+0, 19.133544961493431e+0], [-1.0535973070349851e-3, -1.0561442458614725e-2, -3.7008881840026291e-2, -1.0833335951837601e-1, -3.5573733530518654e-1, -2.2087001711294335e+0], [3.4243667235727351e-5, 3.3485715527829802e-4, 1.1048764105997749e-3, 2.8708927011366331e-3, 7.6416395318503065e-3, 3.6065078464216345e-2], [-9.8092012663987032e-7, -8.6213941131136637e-6, -2.1796292343269942e-5, -3.0875807280986733e-5, -1.0970808012244759e-5, 4.9722158599123828e-5], [2.5971456909256364e-8, 1.7906385610823200e-7, 1.7404534447703752e-7, -4.9915895367269028e-7, -1.2749593060413880e-6, 6.6177461276482571e-7], [-6.4975436721815690e-10, -2.6733838356148732e-9, 5.2052951703377513e-9, 1.4281387226390746e-8, -3.0320560917585442e-8, -9.7977209172073875e-9], [1.5415842329073419e-11, 1.0398627617285393e-11, -2.0772467288655710e-10, 3.0742865064616203e-10, 1.9029726800791137e-10, -1.1594686237212602e-9], [-3.4991874359096675e-13, 9.8273051512284327e-13, 1.3651359808285385e-12, -1.2262691458015198e-11, 3.1285204150405564e-11, -5.3679453741583138e-11], [7.4557492320265857e-15, -4.2170772934418053e-14, 1.1486901678968488e-13, -2.3361040233088146e-13, 5.9450083683354340e-13, -1.7514892511497091e-12], [-1.4978243920464143e-16, 9.6476810529617578e-16, -3.9786248274755392e-15, 1.2392390500354635e-14, -1.7159118679743016e-14, -3.5259878263595532e-14], [2.8968976212555871e-18, -8.2053539536119674e-18, 1.3800937800521412e-17, 2.0050742383684276e-16, -1.0250048327711444e-15, 4.4961710434585424e-16], [-3.7114399028684112e-20, -1.9828269359071728e-19, 3.4942668316514637e-18, -1.2416479904357981e-17, -3.4674725738514502e-18, 8.3221546742848629e-17], [4.5763391948052578e-22, 1.6753717623625285e-20, -9.6041668094230300e-20, -1.4505774761867741e-19, 1.0967272973483232e-18, 3.4613542786675175e-18], [-1.3556254375173868e-23, -6.5715567037953341e-22, -1.0964009035126402e-21, 1.2331665815744818e-20, 2.3955485423160945e-20, 1.2734246257678315e-20]],
        [[1.0209619637861597e-2, 9.9387819558919917e-2, 3.2856766944679886e-1, 8.8400866781419784e-1, 2.6286870203230628e+0, 15.006663897825192e+0], [-8.2053969045938952e-4, -8.2516455515399848e-3, -2.9162510814556908e-2, -8.6960337545003124e-2, -2.9552047985119340e-1, -1.9176406362342187e+0], [2.4594105230479587e-5, 2.4688985327068441e-4, 8.6263729040061774e-4, 2.4628446929488933e-3, 7.3692714361236915e-3, 3.6712212996576834e-2], [-6.5213798792138744e-7, -6.1635551268977254e-6, -1.8430732381471709e-5, -3.6302774769026464e-5, -3.5646809241133162e-5, 5.6593947375109993e-5], [1.6003419809776752e-8, 1.2965975122183165e-7, 2.3301184898845707e-7, -1.7006328528396521e-7, -1.7570556730520802e-6, 2.9268667841328654e-8], [-3.7464329795520014e-10, -2.2165091482182162e-9, 9.7130805747894619e-10, 1.7134843780990458e-8, -1.3934033285773518e-8, -6.2814506480565573e-8], [8.2900124463177727e-12, 2.3743503328684646e-11, -1.3748524173533718e-10, -6.8880459640414078e-11, 1.1866761536241794e-9, -3.5582171137994250e-9], [-1.7817057908030202e-13, 1.1823707792869441e-13, 3.0721671376074766e-12, -1.2152981337594950e-11, 3.3251189959085628e-11, -1.1671151820681016e-10], [3.7933697878363932e-15, -1.4087088112571401e-14, 5.8267519650135504e-15, 2.2265509828844413e-13, -6.3941930691624346e-13, -1.4213698977032881e-12], [-6.2992965089657670e-17, 5.9412657117145776e-16, -1.7467135655338660e-15, 9.5810771295496616e-15, -4.3786564594266027e-14, 9.5864270106519340e-14], [1.4640915055708268e-18, -9.1148508895578799e-18, 6.5569379348916805e-17, -2.9420405649215169e-16, 1.0176818075734913e-16, 6.5783292070848805e-15], [-3.3539022894426042e-20, -7.3495679065394436e-21, -8.1434724876070449e-19, -6.4684041219706575e-18, 4.9172226103518494e-17, 1.3412074160540721e-16], [-1.8325551229176353e-22, -3.6740619092212563e-21, -5.8847951097879604e-20, 2.9315999128958337e-19, 3.9555661863563717e-19, -4.2131773146616948e-18], [-7.1763103025882329e-25, -8.4187636856435873e-23, 1.7778648254788000e-21, 1.7011513728379808e-21, -5.2223215948866114e-20, -3.0213665299314955e-19]],
        [[8.7432487688680846e-3, 8.4648234274282915e-2, 2.7648844442727076e-1, 7.2839508581000872e-1, 2.0949014904326674e+0, 11.467151122753074e+0], [-6.5124326813643448e-4, -6.5402751893557715e-3, -2.3082252158838378e-2, -6.9021413049997193e-2, -2.3876505958593323e-1, -1.6213497754463758e+0], [1.8088437950956504e-5, 1.8401329538239974e-4, 6.6397749035428383e-4, 2.0216292591019070e-3, 6.7693746641915174e-3, 3.7334532441376102e-2], [-4.4668887597849529e-7, -4.4122419972294061e-6, -1.4697373294502426e-5, -3.6470038127689044e-5, -6.4184307408632751e-5, 4.1228742252681221e-5], [1.0159298665015920e-8, 9.1107389721551117e-8, 2.2632973795921280e-7, 1.3372597907956444e-7, -1.6932091474176066e-6, -2.3514767458778474e-6], [-2.2359674079889544e-10, -1.6407039607462794e-9, -1.3174787978240698e-9, 1.2431740890327471e-8, 2.2082828920584348e-8, -1.8737647325010040e-7], [4.7229756760701762e-12, 2.3437557150057845e-11, -5.5289553904376827e-11, -2.7576072158083000e-10, 1.6242038197536206e-9, -6.5429163852334730e-9], [-8.4772690094767230e-14, -6.4466104448428202e-14, 2.6526829335925014e-12, -2.0907121223768067e-12, -7.5056037919977229e-12, -5.0591920732816007e-11], [2.2073590125120110e-15, 1.9746677907514330e-16, -2.3566744161695349e-14, 3.2430692459996259e-13, -1.6469005722783037e-12, 7.2199082748389426e-12], [-3.5430060030313077e-17, 1.7507091067763599e-16, -3.3539190250618404e-16, -3.8731729780744915e-15, -1.2518315966001432e-15, 3.6007635318569879e-13], [-7.0457711713581053e-20, -1.2553494305087748e-17, 6.7578028926091075e-19, -2.9099719649747710e-16, 1.6670824715003893e-15, 2.4741233639580801e-15], [-3.0493614736348624e-20, -9.2740278803766995e-20, -1.4360306316016855e-18, 5.2798976590008099e-18, 2.0501130698304325e-18, -4.2216508825447492e-16], [5.0198403627804825e-22, 2.8296161136288984e-21, 2.7098094225503004e-20, 1.3965646907987377e-19, -1.9382611463000274e-18, -1.5803647072091136e-17], [2.0752447304102314e-23, 2.2753371936765663e-22, 1.1488903648286192e-21, -4.8949472217321672e-21, -5.1948218187139402e-21, 8.0709254172703247e-20]],
        [[7.5702451747722256e-3, 7.2888097021933225e-2, 2.3511917242829739e-1, 6.0517607902037957e-1, 1.6687925940101585e+0, 8.5240203625255986e+0], [-5.2551683310242859e-4, -5.2574733823924994e-3, -1.8416696846321712e-2, -5.4546028342988082e-2, -1.8810491405061138e-1, -1.3216743352135665e+0], [1.3573946510277784e-5, 1.3882728240273324e-4, 5.0829854952101173e-4, 1.6038580341864396e-3, 5.8576047143695405e-3, 3.7452376608886780e-2], [-3.1443598377637694e-7, -3.1870352612581809e-6, -1.1335433152032176e-5, -3.2702079168258415e-5, -8.5799210129663528e-5, -3.4767556772779822e-5], [6.6646121912824094e-9, 6.3787456486036206e-8, 1.9223153818967111e-7, 3.1669914211601918e-7, -9.0811586602506563e-7, -7.5993605466950397e-6], [-1.3200002660465420e-10, -1.0969194628438779e-9, -1.8518441818175490e-9, 6.0874694615502297e-9, 5.2980401423101550e-8, -3.2375834996810666e-7], [3.1301627156875898e-12, 2.1950267006230801e-11, 6.0776750230626616e-12, -2.2292550866705960e-10, 7.5457424241214872e-10, -2.9080519448370343e-9], [-3.7134480177725621e-14, -5.8134432871957184e-14, 1.6169930998617361e-12, 4.3480419691556591e-12, -4.9414479591617959e-11, 3.5930588000370403e-10], [6.5000409032872452e-16, -2.8587206478097535e-15, -4.5659536597876026e-14, 4.3286026207152595e-14, -6.9662386593401660e-13, 1.5864709888453353e-11], [-5.4257784422290332e-17, -3.2841164194662615e-16, -1.0285104743646853e-15, -9.6874660127857710e-15, 4.3618630923787775e-14, -7.1926455525057832e-14], [-5.1560100114241967e-19, -9.7093977682429899e-18, -1.9016607082400980e-17, 1.4258094992875480e-17, 1.8307700670368623e-16, -2.5251432308817835e-14], [1.8204533812869350e-20, 3.0511031179727893e-19, 7.6923721687134814e-19, 7.4375513759216938e-18, -4.8399404610494049e-17, -5.3098327183591193e-16], [1.5115900888842911e-21, 1.3393762239498357e-20, 5.7530029882624675e-20, -5.1301420564720341e-23, 5.6823938024880464e-19, 2.2039861334962826e-17], [1.9716756850625919e-23, 1.9655326770709141e-22, 3.3510859413746845e-22, 6.0811001132201119e-22, 7.3669023175663472e-20, 1.2156877077076748e-18]],
        [[6.6170175408784758e-3, 6.3373923937026523e-2, 2.0195654447463002e-1, 5.0773804793238091e-1, 1.3360644922585580e+0, 6.1771831913401875e+0], [-4.3038120174697780e-4, -4.2839680343652675e-3, -1.4844822844225291e-2, -4.3191154306054905e-2, -1.4552497847515290e-1, -1.0262871005719522e+0], [1.0365702739789920e-5, 1.0607290031242068e-4, 3.8956492032177357e-4, 1.2450234850943033e-3, 4.7776351745663112e-3, 3.6091277408315267e-2], [-2.2517572915263618e-7, -2.3142188929477376e-6, -8.5361454952738866e-6, -2.6911345152485510e-5, -9.1365618897504305e-5, -2.0760309799112750e-4], [4.6957992320215362e-9, 4.6878501077008467e-8, 1.5931104598414075e-7, 3.9431500064341886e-7, 2.1355364847069881e-7, -1.3698916078623503e-5], [-6.8885558372362921e-11, -6.1270755238594283e-10, -1.3646646475566786e-9, 2.0523972017700438e-9, 5.3382356993283026e-8, -2.2548274733587183e-7], [2.0755428971638696e-12, 1.6943824091963385e-11, 2.4917469373507099e-11, -1.2968363369002033e-10, -7.1463239950408129e-10, 1.2344239823479036e-8], [-4.8583558453347294e-14, -3.7477444386624448e-13, -4.6628350167784041e-13, 9.1316747643265670e-13, -4.8374473194763567e-11, 6.1187624830217078e-10], [-1.2629636313613930e-15, -1.6475703905974543e-14, -8.0452757543304569e-14, -2.1453231943742465e-13, 6.4840475714556047e-13, -6.2487498233303218e-12], [-3.4460620907403584e-17, -2.2896461290694633e-16, -2.5694707018642044e-16, -2.3274918622032188e-15, 2.7003396607141224e-14, -1.0508007360375873e-12], [2.1386226603888058e-18, 2.0386085640501139e-17, 7.8283294997901760e-17, 3.6419557747900419e-16, -4.0492990996621327e-16, -8.6130257437564330e-15], [1.0109698459342248e-19, 1.0473271041075383e-18, 3.4690069484531795e-18, 8.5131825989350795e-18, 2.8583271242116626e-17, 1.4200917801447602e-15], [1.0468540547832333e-21, 8.4494342274656005e-21, 2.3657496458432028e-20, -3.5542214284239967e-20, 1.2551324078483448e-18, 3.4473219643402571e-17], [-9.4260894031690058e-23, -9.5947035624881229e-22, -3.6766608172209221e-21, -9.7850910464227831e-21, -8.1567085229240832e-20, -1.5199145003326599e-18]],
        [[5.8314661115878047e-3, 5.5575094443452272e-2, 1.7508837206875467e-1, 4.3037036160546315e-1, 1.0798531316475569e+0, 4.4026757754816025e+0], [-3.5707653786778212e-4, -3.5345263406400920e-3, -1.2096611914528420e-2, -3.4413449921993061e-2, -1.1155835029211737e-1, -7.5146037457088504e-1], [8.0762147380677238e-6, 8.2457396805601778e-5, 3.0160517815996603e-4, 9.6073861598478196e-4, 3.7328298023935498e-3, 3.2202231023515563e-2], [-1.5890995446826941e-7, -1.6447656161488030e-6, -6.1825351423915863e-6, -2.0448165727005247e-5, -8.0746852326691334e-5, -4.4179217697269909e-4], [3.6804159464222422e-9, 3.7528325130574916e-8, 1.3550271975172590e-7, 4.0239091158195805e-7, 1.0157204177310397e-6, -1.4121222940278196e-5], [-4.0302908280068397e-11, -3.9133599413355893e-10, -1.1939870586013082e-9, -1.4898641624336436e-9, 2.3177369818861005e-8, 2.1979534804315259e-7], [1.3071038331779581e-13, -5.3794597796522780e-13, -1.9610803921115029e-11, -1.8917419881486407e-10, -1.6388103230456172e-9, 2.1303748522685994e-8], [-8.3874431832776415e-14, -7.9060017066300203e-13, -2.3081256709956476e-12, -3.8977700061952458e-12, -1.2507658536561305e-11, -1.2357489909460246e-10], [3.0263159000173300e-17, -2.0996284238260044e-18, -1.4807777455414604e-15, 2.6987834903634503e-14, 1.6399898897873477e-12, -3.3564817226822310e-11], [1.2391127820678513e-16, 1.3145559539193515e-15, 5.1092430231276281e-15, 1.5950496073317437e-14, 3.2166396381160908e-14, -4.6283090807278190e-14], [4.3441496829472878e-18, 4.1570400058911162e-17, 1.3226690045414245e-16, 3.4870763479387985e-16, -2.5149844616509184e-17, 5.0810895280205541e-14], [-1.0405391688619543e-19, -1.1187924890938978e-18, -4.6911290319359772e-18, -1.9593524959057924e-17, -6.3857100351750094e-17, 3.4543374318574141e-16], [-1.1039840284208659e-20, -1.1232881840264106e-19, -4.0289704573679500e-19, -1.2130305803011893e-18, -4.5726500357079813e-18, -7.3233666403075497e-17], [-1.9449813678364005e-22, -1.8524379315128919e-21, -5.7135691970948877e-21, -1.0668663043378456e-20, 6.1367492662856439e-21, -7.8018705043730602e-19]],
        [[5.1765488406712463e-3, 4.9109988799464911e-2, 1.5309770695610482e-1, 3.6852700385401774e-1, 8.8374010919771733e-1, 3.1381987732498285e+0], [-2.9915732225257143e-4, -2.9442427580888649e-3, -9.9457575853008139e-3, -2.7603621707109521e-2, -8.5274053729584513e-2, -5.1838930790436673e-1], [6.4945238995714062e-6, 6.6043201208919982e-5, 2.3949712617326438e-4, 7.5212649895746431e-4, 2.8697099122219546e-3, 2.5771900598338286e-2], [-1.0703622749919287e-7, -1.1145126059510423e-6, -4.2507584877928297e-6, -1.4523037288243170e-5, -6.2924201866499601e-5, -6.0802830011710600e-4], [2.7366868592235992e-9, 2.7993764554846585e-8, 1.0245726406878895e-7, 3.2127013359012333e-7, 1.0921289315342909e-6, -5.4763899588243971e-6], [-6.0318112459756919e-11, -6.1888281429429784e-10, -2.2554021332855112e-9, -6.6751628442159374e-9, -1.3560469440241802e-8, 5.8026550937337102e-7], [-1.3937016034819416e-12, -1.4307466267554067e-11, -5.3977151381048676e-11, -1.9520734340952301e-10, -1.1290782028856340e-9, 5.2210618971020175e-9], [3.5412421609170377e-15, 9.5612529332877950e-14, 8.7183886214651525e-13, 6.2249422695895836e-12, 4.9815328197448799e-11, -8.6346238275662768e-10], [5.1067738392947703e-15, 5.1274499642074079e-14, 1.7912046195879645e-13, 5.1018005282306947e-13, 1.6932975018582373e-12, -4.0990172658987602e-12], [6.0225870128485268e-17, 5.3884064112952548e-16, 1.3110127200873858e-15, -4.9738248393277711e-16, -6.1188742712479791e-14, 1.3281596353710730e-12], [-9.5713142474302391e-18, -9.9602576555692458e-17, -3.7775247591855611e-16, -1.2444956170379786e-15, -4.2589854939658271e-15, 2.9411123464031382e-16], [-3.2385787842256421e-19, -3.1494245634901809e-18, -1.0154810330135992e-17, -2.3386003088711216e-17, 6.0151648012515817e-18, -1.9266246416780682e-15], [1.3941054617062596e-20, 1.4908896431052561e-19, 6.0292559731632254e-19, 2.2798991004059704e-18, 1.0688697187430452e-17, 8.7909915577092503e-18], [9.9080750202786051e-22, 1.0012826723620334e-20, 3.5524513211092555e-20, 1.0310077072310953e-19, 2.6275575585961033e-19, 2.4885650495978549e-18]],
        [[4.6265814842677190e-3, 4.3712186501137753e-2, 1.3497781627943585e-1, 3.1883910370123730e-1, 7.3395026791223232e-1, 2.2840236825834163e+0], [-2.5169646603417360e-4, -2.4628234230280752e-3, -8.2097470512418690e-3, -2.2207712518274762e-2, -6.5067175378247422e-2, -3.4200281250837947e-1], [5.4280028506385234e-6, 5.4897963559801770e-5, 1.9665705890400192e-4, 6.0369613399884368e-4, 2.2072278314204359e-3, 1.8332933101566683e-2], [-7.4355352240191834e-8, -7.8011736751518263e-7, -3.0232959554011214e-6, -1.0616534988939236e-5, -4.8544064576709640e-5, -6.0395024656467860e-4], [1.2968406945952197e-9, 1.3320937042793466e-8, 4.9490842616844933e-8, 1.6321317664732340e-7, 6.8220237709062958e-7, 5.5226379188246089e-6], [-7.5131568466860309e-11, -7.5778123597835375e-10, -2.6800538471170208e-9, -7.7902255529115895e-9, -2.0820080922361988e-8, 4.4115912841041259e-7], [7.1490276527726963e-13, 8.0818841235109887e-12, 3.5295455539409423e-11, 1.3646444429282883e-10, 5.0811162509912026e-10, -1.4441628809093087e-8], [1.1745099956452426e-13, 1.1899272880496644e-12, 4.2690524145043145e-12, 1.3038326527680196e-11, 4.5678861954198230e-11, -3.6973261955000428e-10], [-2.8876119649236035e-16, -5.7413402240713093e-15, -4.4463474725089460e-14, -2.8532526446146053e-13, -2.1424663295720593e-12, 2.7409977435091939e-11], [-2.9384591603023888e-16, -2.9729323327629781e-15, -1.0570485833284758e-14, -3.0879293713777216e-14, -8.5494649676769592e-14, 1.2796074711114778e-13], [6.6991982163468751e-20, 6.7489887492876052e-18, 7.6134637851926217e-17, 5.6657898628831930e-16, 4.8940035830386015e-15, -4.2579594030894994e-14], [6.7461532175400888e-19, 6.9004261265027929e-18, 2.5153689798212797e-17, 7.6790339072846741e-17, 2.1252875571855783e-16, 3.5788170881257998e-16], [2.2490468588287780e-21, 8.4885237611371873e-21, -9.5252661763177577e-20, -1.1321433397854584e-18, -1.1304075370165040e-17, 5.5389008555249507e-17], [-1.5441227381584992e-21, -1.5954155354811102e-20, -5.9517374118751052e-20, -1.9020751869798951e-19, -5.8492226690580475e-19, -9.4313479310074450e-19]],
        [[4.1639677001794159e-3, 3.9197951370922282e-2, 1.2002380642366136e-1, 2.7887438730267890e-1, 6.1974283035943375e-1, 1.7251503190789966e+0], [-2.1159183245589224e-4, -2.0584947304332600e-3, -6.7717458587689911e-3, -1.7853525262220947e-2, -4.9579737210449867e-2, -2.2228895740735144e-1], [4.6164257131026708e-6, 4.6376899369586180e-5, 1.6360428012456375e-4, 4.8767198224462247e-4, 1.6793997197196083e-3, 1.1840448611235812e-2], [-6.3709676373249791e-8, -6.6787429247334686e-7, -2.5803932731639429e-6, -8.9785899344302635e-6, -4.0022959119023621e-5, -4.6562101205404452e-4], [1.8965740623175468e-10, 2.3268998635621726e-9, 1.1948808940772756e-8, 6.1038186523778346e-8, 4.4499774179166219e-7, 1.0533375754527798e-5], [-2.7998489531322763e-11, -2.6858791735609234e-10, -8.4370835326190001e-10, -1.9080353111132241e-9, -2.2793618010023157e-9, 6.3433566255858675e-8], [2.5862170010561697e-12, 2.6107378511509003e-11, 9.2325318702443117e-11, 2.6637322084410500e-10, 6.8238747679071328e-10, -1.3799984449646534e-8], [-1.1267199179815801e-14, -1.6156316301663368e-13, -9.5698749026172230e-13, -4.9643491058177876e-12, -2.7813636216872013e-11, 3.1974332321507598e-10], [-5.2385044963888278e-15, -5.2471816545010934e-14, -1.8228075005111592e-13, -5.0814999679267165e-13, -1.2315243333719998e-12, 1.0372271275491435e-11], [9.4833118881221672e-17, 1.0799716076437906e-15, 4.8452079121689482e-15, 2.0321233443878564e-14, 1.0396979662524559e-13, -7.4712177704151372e-13], [1.0730357784462960e-17, 1.0573199742293758e-16, 3.5096355395467811e-16, 8.5423743529900942e-16, 6.8863170641869996e-16, 3.7442914494345729e-15], [-3.7498469366488639e-19, -4.0546031247569990e-18, -1.6585839034840557e-17, -6.1527102732341449e-17, -2.6270733365781811e-16, 1.0293752689978219e-15], [-1.8914797026758214e-20, -1.8192149758488106e-19, -5.6177955471951675e-19, -1.0378310993583558e-18, 3.2594845901941556e-18, -2.8147289790156883e-17], [1.1231069538069191e-21, 1.1918640073453736e-20, 4.6935511170232730e-20, 1.6309088531373878e-19, 5.8503003299099166e-19, -1.0108708700345829e-18]],
        [[3.7753156064505080e-3, 3.5426903241712905e-2, 1.0769298457931553e-1, 2.4673855213162569e-1, 5.3258357013515667e-1, 1.3596249648957448e+0], [-1.7768925948662786e-4, -1.7191108982594847e-3, -5.5841048319375595e-3, -1.4367497471205297e-2, -3.7943776623872126e-2, -1.4705377567868735e-1], [3.8615810265068643e-6, 3.8507811794553937e-5, 1.3357218089079072e-4, 3.8546728018301560e-4, 1.2423987861785537e-3, 7.2570699428129812e-3], [-6.2168623398763884e-8, -6.4385863423818037e-7, -2.4220763516997576e-6, -8.0303131807921055e-6, -3.2680424539441137e-5, -3.0150814146587786e-4], [1.4801345814848172e-10, 2.1001248350766794e-9, 1.2566761258633884e-8, 6.9352986079281682e-8, 4.9092892796848469e-7, 9.3129724584351768e-6], [1.6493697084554520e-11, 1.6893799747945816e-10, 6.1041731396271133e-10, 1.7600465582267209e-9, 3.4857238465951147e-9, -1.4495626133957924e-7], [8.0038416280812166e-13, 7.3599070126166841e-12, 2.0292919141768499e-11, 2.6452128085098780e-11, -1.5159423597767235e-10, -3.6597679454974147e-9], [-8.0882136389414552e-14, -8.1373597959957400e-13, -2.8508972195100681e-12, -8.0267581641492796e-12, -1.8933625632371682e-11, 3.1116263428766126e-10], [1.0579459414440036e-15, 1.2314445554836668e-14, 5.6694313454062368e-14, 2.3830081074137434e-13, 1.1285574698005300e-12, -7.1326437799978031e-12], [1.3441581837922143e-16, 1.3063695602791388e-15, 4.1948283010055468e-15, 9.4890238124821457e-15, 4.8225742801377382e-15, -1.5307104014327897e-13], [-6.1925395959335459e-18, -6.4920372817449105e-17, -2.4860974680894637e-16, -8.2112468681662174e-16, -2.7815695052773930e-15, 1.5467980934268310e-14], [-9.7963227441680683e-20, -8.0289979230504194e-19, -1.2750042128073152e-18, 5.9610847496614757e-18, 8.9216004817884134e-17, -3.2858350143119846e-16], [1.5862831297060548e-20, 1.6038918108774963e-19, 5.6539457903240421e-19, 1.5720557450220425e-18, 2.9734495921805041e-18, -1.1334968536950300e-17], [-2.6710491019816182e-22, -3.1310690554099265e-21, -1.4650628036688396e-20, -6.3159522917614678e-20, -3.0115179769892859e-19, 8.7450767492183475e-19]],
        [[3.4485144658727606e-3, 3.2272868390062192e-2, 9.7504375438493116e-2, 2.2079717480431187e-1, 4.6548991848649190e-1, 1.1137477563278318e+0], [-1.4971199096730410e-4, -1.4410970591064570e-3, -4.6273846921781522e-3, -1.1647759471892328e-2, -2.9436308164152513e-2, -1.0117511051779932e-1], [3.1421858002959948e-6, 3.1107328413458223e-5, 1.0613957388898992e-4, 2.9686804458620368e-4, 8.9869974321171931e-4, 4.4287950563311382e-3], [-5.6778650336186223e-8, -5.8019379067110597e-7, -2.1191921541543778e-6, -6.6634366305352358e-6, -2.4576187457371263e-5, -1.7799720008084824e-4], [5.1899723788800818e-10, 5.7495529085623382e-9, 2.4593147333815059e-8, 9.7758271798304548e-8, 5.0096543622030167e-7, 6.0993231005259393e-6], [1.5111253192805500e-11, 1.4256096897782496e-10, 4.1966286360997907e-10, 6.7866703141494020e-10, -2.8324451847413446e-9, -1.5564712259288977e-7], [-5.9919678582557250e-13, -6.2820366832767849e-12, -2.3971527028251202e-11, -7.7994799706800522e-11, -2.5453533842234490e-10, 1.6939624688504265e-9], [-1.5403295155087798e-14, -1.3427908095361046e-13, -3.0502503781831848e-13, 7.7840154831800963e-14, 6.8150836265313786e-12, 8.1885884347449146e-11], [1.8937938961716271e-15, 1.8801811104225699e-14, 6.3784310473714322e-14, 1.6708754353698704e-13, 3.0617723970806729e-13, -5.4755900946245451e-12], [-5.1174518850235235e-17, -5.4606078946692252e-16, -2.1609046416543949e-15, -7.4645822963567570e-15, -2.7068644096335239e-14, 1.4222930725556238e-13], [-1.3750071052949145e-18, -1.2069866740426892e-17, -2.7911892097931041e-17, 5.0697388587349312e-18, 5.9925144398916687e-16, 5.3786005651654031e-16], [1.4893373708059957e-19, 1.4896328373041215e-18, 5.1271875453889463e-18, 1.3682397907469469e-17, 2.5126804740970791e-17, -2.0113540980816288e-16], [-3.4746402266434311e-21, -3.8160243860547442e-20, -1.5909939810964606e-19, -5.8718607057833806e-19, -2.2584426187305983e-18, 7.8429041541300475e-18], [-1.3128321575540567e-22, -1.1721821479100578e-21, -2.8590767083985718e-21, -4.4114397715576311e-22, 5.4344145477037767e-20, -6.6012049438153966e-20]],
        [[3.1721817796876211e-3, 2.9618697364483458e-2, 8.9023207165768191e-2, 1.9964244541773587e-1, 4.1296521838478099e-1, 9.4108977274188869e-1], [-1.2714112871928862e-4, -1.2183626129057417e-3, -3.8728659859560202e-3, -9.5656617120335277e-3, -2.3296197776373986e-2, -7.2849201124325709e-2], [2.5179530026884968e-6, 2.4763432765758583e-5, 8.3245958452835354e-5, 2.2643168218854968e-4, 6.4913738693037912e-4, 2.7841944585328194e-3], [-4.6885099893681345e-8, -4.7388262445766618e-7, -1.6894955240369210e-6, -5.0838048072946288e-6, -1.7270727305165281e-5, -1.0261990838279548e-4], [6.7011013129669349e-10, 7.0590240988594377e-9, 2.7428102505980176e-8, 9.4931999889946233e-8, 4.0127529915711840e-7, 3.4958842580422296e-6], [5.7720318559682009e-13, -4.3115273994656381e-12, -9.8710084590574792e-11, -7.8922119788544287e-10, -6.2544592529173230e-9, -1.0271598923040230e-7], [-4.7685141714585777e-13, -4.6693338743071993e-12, -1.5288766667479084e-11, -3.6522442790342906e-11, -3.4974851684731319e-11, 2.2619699530580818e-9], [1.4585056168566771e-14, 1.5260442342717524e-13, 5.8067053113085032e-13, 1.8898908081274446e-12, 6.3523740039996924e-12, -1.8750626294091245e-11], [1.3381860438534240e-16, 9.1903538245929644e-16, -1.8129153606567666e-16, -1.9596392452227158e-14, -1.7981918549787712e-13, -1.2433153102748024e-12], [-3.0159583068171101e-17, -2.9313698980920860e-16, -9.4362953317604021e-16, -2.1799476679044098e-15, -1.9706217893925227e-15, 7.6240973483056310e-14], [1.2150531978198994e-18, 1.2447847155745496e-17, 4.5290227756836158e-17, 1.3602564186845477e-16, 3.7836424181858213e-16, -2.2233669111300363e-15], [-9.5882496400224001e-21, -1.2445153504916052e-19, -6.5734932554582412e-19, -3.0671958448897320e-18, -1.5176846025479326e-17, 2.1027663605492158e-17], [-1.4365704900923383e-21, -1.3499719792992617e-20, -3.9491718444612397e-20, -6.5833607967349075e-20, 1.4899152138812318e-19, 1.4397118773872940e-18], [8.0656503196798832e-23, 8.1340495266406324e-22, 2.8486339858271228e-21, 7.8439590541936900e-21, 1.6131698719237879e-20, -8.8809490563106882e-20]],
        [[2.9363886281231841e-3, 2.7363402501050486e-2, 8.1884343821580313e-2, 1.8214668218462289e-1, 3.7098038005978376e-1, 8.1434504812615353e-1], [-1.0906819263905292e-4, -1.0411204576228772e-3, -3.2807868865282016e-3, -7.9738365175583878e-3, -1.8832497494720886e-2, -5.4688604533051249e-2], [2.0184075620417431e-6, 1.9735842004716554e-5, 6.5489802250693234e-5, 1.7390904434629374e-4, 4.7627227955891888e-4, 1.8294995814437905e-3], [-3.6555065990710498e-8, -3.6629851515627771e-7, -1.2811527989023328e-6, -3.7226912751931170e-6, -1.1847915072708088e-5, -6.0403189755323526e-5], [5.9964315786991115e-10, 6.1853067201245063e-9, 2.3004888674159500e-8, 7.4109046564747733e-8, 2.7884676855293268e-7, 1.9273907357724622e-6], [-6.1858899262510181e-12, -6.8492654500359290e-11, -2.9183831312354554e-10, -1.1434780924515222e-9, -5.5996800321675121e-9, -5.7243083607504418e-8], [-1.1340120885422609e-13, -9.8209529433051144e-13, -2.1421356983383232e-12, 1.6962268733886102e-12, 6.5869656652014008e-11, 1.4843182723260421e-9], [9.3391660039415005e-15, 9.2145907779462142e-14, 3.0799377817465275e-13, 7.8135792129508246e-13, 1.2745113166893764e-12, -2.9288636146524832e-11], [-2.7588478124786291e-16, -2.8573778984163820e-15, -1.0654705968045163e-14, -3.3631967451465507e-14, -1.0846899867086556e-13, 2.1689717811289231e-13], [1.0597302553946197e-18, 1.6926417789772812e-17, 1.0882432740710353e-16, 5.8142216080942139e-16, 3.2998390467014106e-15, 1.4321765051375790e-14], [3.1664894674517735e-19, 2.9797222080425596e-18, 8.8010549062213857e-18, 1.5705362781177921e-17, -2.1497215073833203e-17, -8.5575850442604422e-16], [-1.7018342836543321e-20, -1.6947703173678620e-19, -5.7882661367158418e-19, -1.5396974051209571e-18, -3.1402703040442449e-18, 2.6816446193482865e-17], [4.1636567364586129e-22, 4.3898713941322087e-21, 1.6910488167524092e-20, 5.5517426702967007e-20, 1.8201377369320782e-19, -4.6095196753647828e-19], [1.8179295590100937e-24, 5.7527318496357865e-24, -7.8224877059411829e-23, -7.5007184430131512e-22, -5.0403834860159477e-21, -3.2402889708864680e-21]],
        [[2.7331189667217400e-3, 2.5426244918016196e-2, 7.5802125069265347e-2, 1.6746192923052154e-1, 3.3672364407724267e-1, 7.1762833537388395e-1], [-9.4522463633802673e-5, -8.9924243279700934e-4, -2.8125562623113973e-3, -6.7427904231205486e-3, -1.5523090147321509e-2, -4.2503456820074328e-2], [1.6329527931724818e-6, 1.5886672565551763e-5, 5.2129253012122978e-5, 1.3561933108433166e-4, 3.5746807715701795e-4, 1.2574616579072725e-3], [-2.8026367497118796e-8, -2.7886888000932170e-7, -9.6026101780383269e-7, -2.7121711308663648e-6, -8.1900344445261279e-6, -3.7048810829114294e-5], [4.6510420448747618e-10, 4.7397531208059836e-9, 1.7174381178288473e-8, 5.2879738194653426e-8, 1.8395491097272843e-7, 1.0777166104901431e-6], [-6.6744200125405602e-12, -7.0343928022635489e-11, -2.7322929958930427e-10, -9.4068192560647021e-10, -3.8833335308644824e-9, -3.0386003032874064e-8], [4.0860063620440961e-14, 5.0642962136525922e-13, 2.5580361967941924e-12, 1.1952422192536331e-11, 6.8675878715106930e-11, 8.0326491207526094e-10], [2.4395054459045394e-15, 2.2377048188116695e-14, 6.0831927727560171e-14, 6.8909181941902397e-14, -6.1318123282609487e-13, -1.8785145760406646e-11], [-1.3960299701223124e-16, -1.3776337336409692e-15, -4.6121049529673720e-15, -1.1812679591098041e-14, -2.1240221994137546e-14, 3.4221379158505779e-13], [4.1446597515141923e-18, 4.2439902325760039e-17, 1.5458822301646436e-16, 4.6993837907171984e-16, 1.4271044583571049e-15, -2.6226885419924794e-15], [-5.1771589421421820e-20, -5.8819299314586363e-19, -2.5905272337142380e-18, -1.0228973766769366e-17, -4.5325772525452685e-17, -1.3098204253840094e-16], [-2.0397684293044470e-21, -1.7887966663760512e-20, -4.1993274649509810e-20, -5.9699035486211880e-21, 7.0865269169864904e-19, 7.9515113383127382e-18], [1.5762932034867950e-22, 1.5291615917759315e-21, 4.9067045175270379e-21, 1.1360965951484204e-20, 1.2758513204733333e-20, -2.5927181237319606e-19], [-5.4524564283076813e-24, -5.5044923449282578e-23, -1.9383520429619146e-22, -5.4792070426804163e-22, -1.3517091496258063e-21, 5.5290007982558822e-21]],
        [[2.5561555417501091e-3, 2.3745099127601580e-2, 7.0560595153708092e-2, 1.5496751514167135e-1, 3.0825776181771732e-1, 6.4145353102125693e-1], [-8.2687313477410005e-5, -7.8434742689981259e-4, -2.4373351092938164e-3, -5.7749645270685622e-3, -1.3011785115157298e-2, -3.3969151123768683e-2], [1.3370989850091824e-6, 1.2951376693940625e-5, 4.2086324206498193e-5, 1.0757969422470898e-4, 2.7455624835711326e-4, 8.9923696271440145e-4], [-2.1583579658903727e-8, -2.1348775693906829e-7, -7.2551432519089328e-7, -2.0009576808493414e-6, -5.7852574429496923e-6, -2.3777581165758732e-5], [3.4487086064384189e-10, 3.4847554484924443e-9, 1.2394602051531713e-8, 3.6926603748793101e-8, 1.2114383404147683e-7, 6.2611315891417456e-7], [-5.2577430812602332e-12, -5.4422602420375979e-11, -2.0367823452847999e-10, -6.6046173244962135e-10, -2.4813906720570254e-9, -1.6291940519416153e-8], [6.5689722551082953e-14, 7.0901297141873479e-13, 2.8832753832228970e-12, 1.0599732561068681e-11, 4.7592962376862237e-11, 4.1224152534715247e-10], [-1.1760360486049637e-16, -2.4014379854457806e-15, -1.8393450632613480e-14, -1.1160488040475586e-13, -7.5647737351218032e-13, -9.8528525183530019e-12], [-3.5196500377511953e-17, -3.2798513904138533e-16, -9.3888747893604289e-16, -1.4387756270532143e-15, 5.3711738825272874e-15, 2.1122080794883349e-13], [1.6975491453776547e-18, 1.6706907866726328e-17, 5.5626024171465988e-17, 1.4132969018915993e-16, 2.5453042088024308e-16, -3.6293398610901352e-15], [-5.0567362671363498e-20, -5.1246987463679155e-19, -1.8265995240336520e-18, -5.3546214980247064e-18, -1.5262434120723424e-17, 3.0833079265436717e-17], [8.9496732097475891e-22, 9.5491726607692537e-21, 3.7748297201666171e-20, 1.3036985041717786e-19, 4.9366271267800692e-19, 9.6426724956179127e-19], [3.8166924484895162e-24, 1.4095041474754465e-23, -1.3994094094522233e-22, -1.4137801722945848e-21, -1.0076482458167862e-20, -6.2639636374782785e-20], [-1.0124615196757896e-24, -9.4970591854081923e-24, -2.7905146052459856e-23, -5.0152041942773822e-23, 4.7369890626725601e-23, 2.0934423255853336e-21]],
        [[2.3593490613691866e-3, 2.1881532230695299e-2, 6.4791999266116576e-2, 1.4139394263590553e-1, 2.7805226709374905e-1, 5.6464529392547906e-1], [-1.1267864223589084e-4, -1.0653789250105557e-3, -3.2870855969388838e-3, -7.6893076065161113e-3, -1.6930961567411338e-2, -4.2086062121028786e-2], [2.6905845213164526e-6, 2.5934990020045942e-5, 8.3378911862653774e-5, 2.0907359188183280e-4, 5.1545672622344949e-4, 1.5683971333206047e-3], [-6.4228035677454184e-8, -6.3116548343330110e-7, -2.1143708661589956e-6, -5.6832681207954978e-6, -1.5689194018996393e-5, -5.8437028540948260e-5], [1.5302665053005331e-9, 1.5331844041226994e-8, 5.3525356671032087e-8, 1.5425555824945842e-7, 4.7695349308647791e-7, 2.1754575732876197e-6], [-3.6097213230098232e-11, -3.6892713363758447e-10, -1.3436432778928502e-9, -4.1579426799717222e-9, -1.4426452268418032e-8, -8.0752279803184049e-8], [8.1543045461205640e-13, 8.5282083598866589e-12, 3.2595143586467167e-11, 1.0917990904951114e-10, 4.2897377694743340e-10, 2.9733650061249460e-9], [-1.5428452818601933e-14, -1.6814683831785046e-13, -6.9639311707225130e-13, -2.6250897077896387e-12, -1.2134585271199122e-11, -1.0741120027441293e-10], [7.4164266398482578e-17, 1.2115684375675956e-15, 8.0696887701978642e-15, 4.5758027376934981e-14, 2.9872537163648688e-13, 3.7294841296841542e-12], [1.6160431118047550e-17, 1.4690291003918850e-16, 3.8841526814801667e-16, 3.6756267236562185e-16, -4.5034982144938862e-15, -1.2001070790695628e-13], [-1.2864422753010207e-18, -1.2492504590416476e-17, -4.0258906785115781e-17, -9.4718246535320602e-17, -1.1513092208230499e-16, 3.3314726373770415e-15], [6.6138805633602755e-20, 6.5875002846773079e-19, 2.2600887171587648e-18, 6.1739856778410622e-18, 1.4995326514951740e-17, -6.4825371509476846e-17], [-2.4860263239873274e-21, -2.5388514003646269e-20, -9.2051948117157753e-20, -2.7892170893793527e-19, -8.6531442138298639e-19, -2.2246480932663813e-19], [5.6533426638251037e-23, 6.1266472492878933e-22, 2.4896069366599000e-21, 8.9090916088354747e-21, 3.5387912566473541e-20, 1.0534886576155629e-19]],
        [[2.1533373569639589e-3, 1.9936884994977836e-2, 5.8813599133955519e-2, 1.2749791690930401e-1, 2.4779691032769458e-1, 4.9114978140483673e-1], [-9.3869332587048854e-5, -8.8452069325744120e-4, -2.7087818551392418e-3, -6.2530653280559978e-3, -1.3449453367475854e-2, -3.1853935309435282e-2], [2.0459938869992086e-6, 1.9621293637904244e-5, 6.2379120843489946e-5, 1.5333870191828943e-4, 3.6499113235820246e-4, 1.0329544061901692e-3], [-4.4593765406456980e-8, -4.3524787657497102e-7, -1.4364622257531364e-6, -3.7601131432141735e-6, -9.9049242031531595e-6, -3.3495901566620710e-5], [9.7176540650513109e-10, 9.6530788291174875e-9, 3.3073089308737156e-8, 9.2190019971394314e-8, 2.6876038294860777e-7, 1.0860823599199953e-6], [-2.1151872457374453e-11, -2.1385507240391857e-10, -7.6072517075682900e-10, -2.2584428522202429e-9, -7.2880346531667696e-9, -3.5202227692833888e-8], [4.5776895810120844e-13, 4.7124317723260441e-12, 1.7416537679819379e-11, 5.5124381246686110e-11, 1.9713796762000872e-10, 1.1395112701694116e-9], [-9.6686152407694423e-15, -1.0154482617675340e-13, -3.9137340869900940e-13, -1.3270461721651222e-12, -5.2872386618852924e-12, -3.6749996867160120e-11], [1.8573703672448756e-16, 2.0100533769654718e-15, 8.2222990948818966e-15, 3.0511132970901615e-14, 1.3825799084665320e-13, 1.1743565693421627e-12], [-2.3040233069875679e-18, -2.7626613091219166e-17, -1.3375300923944302e-16, -6.0393410685046510e-16, -3.3741096767673200e-15, -3.6778800853462345e-14], [-5.5137964479301317e-20, -4.1485495910970210e-19, -3.1117552649538830e-19, 5.9016604957918072e-18, 6.7717784012129849e-17, 1.1066265802413683e-15], [6.6957854072853101e-21, 6.3008421839817847e-20, 1.8628774039531822e-19, 3.3320646461219197e-19, -5.2224729073494076e-19, -3.0861354502074459e-17], [-3.9000850692302585e-22, -3.8014270685557787e-21, -1.2390604493428879e-20, -3.0256856957402871e-20, -4.8952128538167243e-20, 7.4078710845272283e-19], [1.7393183909155877e-23, 1.7269230698721666e-22, 5.8893697238127095e-22, 1.5977387402950041e-21, 3.9157469130851965e-21, -1.2152083674722555e-20]],
        [[1.9804396557182938e-3, 1.8309936157552950e-2, 5.3846153448841790e-2, 1.1609130930700583e-1, 2.2348676361768613e-1, 4.3461113585186339e-1], [-7.9406246206732546e-5, -7.4610605128263297e-4, -2.2707284640872351e-3, -5.1847867728443195e-3, -1.0941483336416394e-2, -2.4948015557780203e-2], [1.5919068626568076e-6, 1.5201422563891665e-5, 4.7879064939502906e-5, 1.1577959558798808e-4, 2.6783697811105567e-4, 7.1604628872821490e-4], [-3.1913899023633076e-8, -3.0971849121981046e-7, -1.0095442849786437e-6, -2.5854280271989540e-6, -6.5563815989165059e-6, -2.0551599598716096e-5], [6.3978686267746587e-10, 6.3102052053665571e-9, 2.1286239582753106e-8, 5.7733430681154687e-8, 1.6049195700592823e-7, 5.8985697173888093e-7], [-1.2824604078871313e-11, -1.2855090710519284e-10, -4.4877846680074238e-10, -1.2891038098599780e-9, -3.9284012414479985e-9, -1.6928984108388677e-8], [2.5691253414769073e-13, 2.6173122250957495e-12, 9.4568106512837879e-12, 2.8772087262702539e-11, 9.6128798743436844e-11, 4.8578770672465895e-10], [-5.1313788421180657e-15, -5.3142239294143894e-14, -1.9881198301035157e-13, -6.4103736492268636e-13, -2.3495932583090526e-12, -1.3932423294865651e-11], [1.0121902577676507e-16, 1.0668159729375859e-15, 4.1409050022568344e-15, 1.4186974176632683e-14, 5.7202442684019225e-14, 3.9894131098376968e-13], [-1.9044236477393002e-18, -2.0531673672798660e-17, -8.3432947564428303e-17, -3.0703960921985057e-16, -1.3760386337139802e-15, -1.1375764488491981e-14], [2.9888930377981592e-20, 3.3816779303954003e-19, 1.4998398449132533e-18, 6.1985311869617239e-18, 3.2030029030932458e-17, 3.2127469365572700e-16], [-1.1193011081870721e-22, -2.1680012805676432e-21, -1.6266644889711984e-20, -9.9111308244745854e-20, -6.8365175089546351e-19, -8.8932526502090997e-18], [-2.3131484361163028e-23, -2.0242097634357280e-22, -4.6398960802073283e-22, 1.2526537227888632e-22, 1.1297566482317868e-20, 2.3678697493183822e-19], [1.6278287390496101e-24, 1.5476377095355416e-23, 4.7220300454643143e-23, 9.5399810326012175e-23, -1.4514437853640613e-23, -5.8577285551083532e-21]],
        [[1.8332609162990936e-3, 1.6928661470443334e-2, 4.9653048957787259e-2, 1.0655965644637673e-1, 2.0352468164754991e-1, 3.8976104887927515e-1], [-6.8046371632769594e-5, -6.3782026360441382e-4, -1.9309746526654976e-3, -4.3686896979816576e-3, -9.0750945197049994e-3, -2.0067865019791097e-2], [1.2628613337154702e-6, 1.2015559700041807e-5, 3.7547171368131326e-5, 8.9552885890013816e-5, 2.0232764680788872e-4, 5.1662320286453416e-4], [-2.3437231545364598e-8, -2.2635476957701679e-7, -7.3009240339574667e-7, -1.8357262929435087e-6, -4.5108591066025218e-6, -1.3299845855949657e-5], [4.3496716832942159e-10, 4.2641731404572695e-9, 1.4196392475853344e-8, 3.7630143597343196e-8, 1.0056872803971643e-7, 3.4238840628317740e-7], [-8.0724048018885759e-12, -8.0329757343593330e-11, -2.7604184375436095e-10, -7.7136696184822732e-10, -2.2421489450280678e-9, -8.8143448319756565e-9], [1.4980472008824245e-13, 1.5131971921133980e-12, 5.3672506137630970e-12, 1.5811384022504790e-11, 4.9986661978769577e-11, 2.2691028423050936e-10], [-2.7791852635139597e-15, -2.8496603845368283e-14, -1.0433367450399894e-13, -3.2403936264408462e-13, -1.1142679457730661e-12, -5.8410508079625143e-12], [5.1486342763584249e-17, 5.3595013020566471e-16, 2.0259349537506332e-15, 6.6355623690474077e-15, 2.4826204716383398e-14, 1.5032569107930944e-13], [-9.4819433529886373e-19, -1.0026144062630020e-17, -3.9169884448516127e-17, -1.3547044140224924e-16, -5.5218331786132063e-16, -3.8662338971675208e-15], [1.7079580992940919e-20, 1.8390296401141558e-19, 7.4577279467302392e-19, 2.7377108825950730e-18, 1.2216330284839092e-17, 9.9258570922162839e-17], [-2.8429706157428783e-22, -3.1500109734037038e-21, -1.3494461313871410e-20, -5.3613540697745070e-20, -2.6626536745609926e-19, -2.5373043988270661e-18], [3.4233592943547718e-24, 4.1481306462716960e-23, 2.0498030945959876e-22, 9.5509454435677368e-22, 5.5820081974686255e-21, 6.4248219502998773e-20], [3.0849633451493929e-26, 1.3028282960077704e-25, -1.0409327441012306e-24, -1.2133012438309807e-23, -1.0582017765000422e-22, -1.5951432436679758e-21]],
        [[1.7064566006778577e-3, 1.5741289500116294e-2, 4.6066208546710425e-2, 9.8475470586682652e-2, 1.8683900179858550e-1, 3.5331088011300640e-1], [-5.8961276942889496e-5, -5.5151145997872356e-4, -1.6621588588845399e-3, -3.7311983398097449e-3, -7.6486712999191104e-3, -1.6491859126270058e-2], [1.0186113657320668e-6, 9.6613714634833685e-6, 2.9986970472190791e-5, 7.0686846997092133e-5, 1.5655771028610234e-4, 3.8490382355131857e-4], [-1.7597466702435386e-8, -1.6924779399396073e-7, -5.4099425439959446e-7, -1.3391489419502417e-6, -3.2045195243234896e-6, -8.9832778421853855e-6], [3.0401272105559605e-10, 2.9648807063562651e-9, 9.7600644585122298e-9, 2.5369921863615159e-8, 6.5592073689658233e-8, 2.0966088855164629e-7], [-5.2521014139090515e-12, -5.1938712982104742e-11, -1.7608099830123559e-10, -4.8062812337582004e-10, -1.3425783595371905e-9, -4.8932781530962058e-9], [9.0734533304916200e-14, 9.0985754230041631e-13, 3.1766600469718669e-12, 9.1053771628364939e-12, 2.7480647825187789e-11, 1.1420412887124382e-10], [-1.5674760509195614e-15, -1.5938415414231469e-14, -5.7308613859122700e-14, -1.7249619630624187e-13, -5.6248292516596140e-13, -2.6653918670210650e-12], [2.7075099065609927e-17, 2.7916586201272634e-16, 1.0337679168517854e-15, 3.2675815065322588e-15, 1.1512497105251315e-14, 6.2205658276084615e-14], [-4.6737357431469575e-19, -4.8868517056804011e-18, -1.8638932798059861e-17, -6.1876516476451760e-17, -2.3558200548557384e-16, -1.4516513634536801e-15], [8.0467227862301510e-21, 8.5344045365049876e-20, 3.3543198649788062e-19, 1.1702180405030324e-18, 4.8173331722217689e-18, 3.3867397344380141e-17], [-1.3718618938327503e-22, -1.4775571538194297e-21, -5.9961439606601519e-21, -2.2034541702331349e-20, -9.8287395556222048e-20, -7.8956215901567276e-19], [2.2604433500080726e-24, 2.4833800096451248e-23, 1.0484390804560598e-22, 4.0927469624810996e-22, 1.9924850880853124e-21, 1.8373643689993595e-20], [-3.3092252310622234e-26, -3.7783148091847731e-25, -1.7091762534418745e-24, -7.3031889226903446e-24, -3.9696969612985504e-23, -4.2554669563185224e-22]],
        [[1.5960677847013041e-3, 1.4709647785980025e-2, 4.2962941757478319e-2, 9.1532114540055601e-2, 1.7268372960978180e-1, 3.2310092097601026e-1], [-5.1581655012053713e-5, -4.8160985950093292e-4, -1.4458192727898262e-3, -3.2237428805952015e-3, -6.5340172699984265e-3, -1.3793379799215495e-2], [8.3350693473930565e-7, 7.8842151810246149e-6, 2.4327865877124605e-5, 5.6769791740226941e-5, 1.2361726776513767e-4, 2.9442399251993430e-4], [-1.3468621932829389e-8, -1.2906888796805450e-7, -4.0934926590341313e-7, -9.9971039025399627e-7, -2.3387187780315047e-6, -6.2845719186282317e-6], [2.1763919230814489e-10, 2.1129278431988167e-9, 6.8878553398657569e-9, 1.7604800553807465e-8, 4.4246290229453424e-8, 1.3414614675820655e-7], [-3.5168272239462412e-12, -3.4589775912450499e-11, -1.1589748310166689e-10, -3.1001877809401622e-10, -8.3709686334946866e-10, -2.8633912740764485e-9], [5.6828322214139870e-14, 5.6625325497615343e-13, 1.9501314424430477e-12, 5.4593985633659434e-12, 1.5837057635719666e-11, 6.1119972334169338e-11], [-9.1828564425752510e-16, -9.2698538072833163e-15, -3.2813539086126671e-14, -9.6139320375730916e-14, -2.9962144063921544e-13, -1.3046240537310469e-12], [1.4838358457207763e-17, 1.5175063549781217e-16, 5.5212624654815850e-16, 1.6929897315030427e-15, 5.6685152403042356e-15, 2.7847527255499114e-14], [-2.3975559663831589e-19, -2.4840773343097035e-18, -9.2897620582721659e-18, -2.9812167639403150e-17, -1.0724007302159789e-16, -5.9440719371418542e-16], [3.8728995773017179e-21, 4.0653259718445413e-20, 1.5627390650668882e-19, 5.2489629994691672e-19, 2.0286672521588914e-18, 1.2687264916895053e-17], [-6.2492371140321859e-23, -6.6466086816860080e-22, -2.6268391481514078e-21, -9.2369414915212902e-21, -3.8365749651442559e-20, -2.7077550219160294e-19], [1.0042168605431133e-24, 1.0827480652589236e-23, 4.4032407519374094e-23, 1.6225780305041423e-22, 7.2491564302857028e-22, 5.7773464187292706e-21], [-1.5905530380609974e-26, -1.7417378607680550e-25, -7.3115192656758748e-25, -2.8333841129266297e-24, -1.3656450757711310e-23, -1.2312079232054519e-22]],
        [[1.4990992643043105e-3, 1.3804970970184101e-2, 4.0251586745611447e-2, 8.5503894204674715e-2, 1.6052349509535884e-1, 2.9765391898943350e-1], [-4.5505799461102516e-5, -4.2420490886623251e-4, -1.2691326741258237e-3, -2.8132112529417446e-3, -5.6464536610431653e-3, -1.1707049195217703e-2], [6.9067400468410001e-7, 6.5175727313983705e-6, 2.0007878878313151e-5, 4.6279515262345578e-5, 9.9307702362627018e-5, 2.3022542643555798e-4], [-1.0482852436127045e-8, -1.0013734735396430e-7, -3.1542424630962823e-7, -7.6133405575078099e-7, -1.7465865019752321e-6, -4.5275069825811403e-6], [1.5910573502104554e-10, 1.5385310983616344e-9, 4.9726638064053887e-9, 1.2524537931283868e-8, 3.0718306192143427e-8, 8.9035862772159331e-8], [-2.4148613192786191e-12, -2.3638312761440817e-11, -7.8394053642312800e-11, -2.0603839923883823e-10, -5.4026200990459997e-10, -1.7509381834782201e-9], [3.6652073456876949e-14, 3.6318396248516081e-13, 1.2358823743605292e-12, 3.3894920228109897e-12, 9.5019248321600558e-12, 3.4433141959493472e-11], [-5.5629460095625560e-16, -5.5800333878384212e-15, -1.9483685396093154e-14, -5.5759776842145243e-14, -1.6711626603110188e-13, -6.7714624789747272e-13], [8.4432720438856265e-18, 8.5732719095134694e-17, 3.0716009305540341e-16, 9.1729117091737325e-16, 2.9391767542418663e-15, 1.3316442557595873e-14], [-1.2814884663913614e-19, -1.3172085507435673e-18, -4.8423582227147855e-18, -1.5090104005132911e-17, -5.1693024583297741e-17, -2.6187474383316928e-16], [1.9449501654962829e-21, 2.0237332226659383e-20, 7.6338124990214380e-20, 2.4824003862955052e-19, 9.0914876581443979e-19, 5.1498863895114893e-18], [-2.9515915523000942e-23, -3.1089278870954728e-22, -1.2033530611192431e-21, -4.0834635333017107e-21, -1.5989145749563985e-20, -1.0127374412951740e-19], [4.4772823377634937e-25, 4.7741898187056463e-24, 1.8963284854867303e-23, 6.7158160694246701e-23, 2.8117073917808492e-22, 1.9915010937577151e-21], [-6.7790528577511529e-27, -7.3192902499323957e-26, -2.9843977281653510e-25, -1.1034518725582494e-24, -4.9412189303025703e-24, -3.9142757919646820e-23]],
        [[1.4132430184084607e-3, 1.3005170017078090e-2, 3.7862280585332712e-2, 8.0220991999476101e-2, 1.4996408198561633e-1, 2.7592508530371562e-1], [-4.0443691890106414e-5, -3.7648553544757031e-4, -1.1229669772372628e-3, -2.4763993673049322e-3, -4.9282207045401408e-3, -1.0060746907973860e-2], [5.7870167847842851e-7, 5.4494235067710204e-6, 1.6653181114159542e-5, 3.8222874546528120e-5, 8.0977254656840572e-5, 1.8341686518804252e-4], [-8.2805405990997815e-9, -7.8877443514062669e-8, -2.4696045996213838e-7, -5.8996467124308823e-7, -1.3305645515659856e-6, -3.3438617175356808e-6], [1.1848479996281312e-10, 1.1417081251848690e-9, 3.6623314408254675e-9, 9.1060213927213173e-9, 2.1862954398405450e-8, 6.0961739665912714e-8], [-1.6953781764222825e-12, -1.6525604594967635e-11, -5.4311008260971610e-11, -1.4055015433841090e-10, -3.5923756906739066e-10, -1.1113897693210547e-9], [2.4258868302885188e-14, 2.3919914463408267e-13, 8.0541197960818442e-13, 2.1693717835447367e-12, 5.9027535163729321e-12, 2.0261679303029241e-11], [-3.4711587941873359e-16, -3.4622775847404090e-15, -1.1943958938214255e-14, -3.3483946933479467e-14, -9.6990131138416052e-14, -3.6938944239451193e-13], [4.9668197890904172e-18, 5.0114583304912185e-17, 1.7712444363031055e-16, 5.1681997126128912e-16, 1.5936774731630063e-15, 6.7343163561712849e-15], [-7.1069323095828584e-20, -7.2538108909904184e-19, -2.6266885621853853e-18, -7.9770413586974915e-18, -2.6186247286545306e-17, -1.2277290217115046e-16], [1.0169161963467799e-21, 1.0499475679173287e-20, 3.8952745060290370e-20, 1.2312435312191994e-19, 4.3027471572986962e-19, 2.2382645150843994e-18], [-1.4550712173187458e-23, -1.5197266071324696e-22, -5.7764989969601393e-22, -1.9003958414390388e-21, -7.0699643839111259e-21, -4.0805605606241604e-20], [2.0819291517427028e-25, 2.1996206220260505e-24, 8.5660198859567316e-24, 2.9331606770727749e-23, 1.1616734642973279e-22, 7.4392052654746936e-22], [-2.9779072165911240e-27, -3.1826797479768966e-26, -1.2698743360322565e-25, -4.5258448968249367e-25, -1.9081848845811380e-24, -1.3557648972081584e-23]],
        [[1.3366917579932870e-3, 1.2293000824589210e-2, 3.5740840309567657e-2, 7.5553175814429914e-2, 1.4070876382420717e-1, 2.5715454914035407e-1], [-3.6181703190272953e-5, -3.3638896388873668e-4, -1.0006757268413881e-3, -2.1966545515482112e-3, -4.3388232736913450e-3, -8.7388692555758468e-3], [4.8968493967312260e-7, 4.6025188089059997e-6, 1.4008511014519732e-5, 3.1933080024915921e-5, 6.6894864572347906e-5, 1.4848626268004952e-4], [-6.6274199111535352e-9, -6.2972278107611649e-8, -1.9610586684593335e-7, -4.6421573167203327e-7, -1.0313678672479119e-6, -2.5230003516324789e-6], [8.9695825050396780e-11, 8.6159513403557781e-10, 2.7452961254424341e-9, 6.7483701967857357e-9, 1.5901365290017186e-8, 4.2869492836868527e-8], [-1.2139476808898970e-12, -1.1788459895342582e-11, -3.8431541786833653e-11, -9.8102018534870541e-11, -2.4516317224459344e-10, -7.2841583826816863e-10], [1.6429627254467786e-14, 1.6129128543954134e-13, 5.3800513188958933e-13, 1.4261230133484214e-12, 3.7798629191200301e-12, 1.2376858187881815e-11], [-2.2235937829030210e-16, -2.2068089452422054e-15, -7.5315615344001798e-15, -2.0731753321011617e-14, -5.8276957151170364e-14, -2.1030105405786656e-13], [3.0094226840066877e-18, 3.0193855125830541e-17, 1.0543471730951628e-16, 3.0138044951315301e-16, 8.9849917899363307e-16, 3.5733247184083694e-15], [-4.0729672673162988e-20, -4.1311635557559370e-19, -1.4759860051610386e-18, -4.3812104421545712e-18, -1.3852829778532557e-17, -6.0716050813071462e-17], [5.5123729605656098e-22, 5.6523124464991528e-21, 2.0662401611632645e-20, 6.3690274406195439e-20, 2.1357936485504133e-19, 1.0316551213719776e-18], [-7.4604662299824140e-24, -7.7335635576153706e-23, -2.8925384146387322e-22, -9.2587416584673795e-22, -3.2929109657930783e-21, -1.7529338217373488e-20], [1.0096990819796761e-25, 1.0581131978446193e-24, 4.0492690058207865e-24, 1.3459540933270792e-23, 5.0769203271321747e-23, 2.9784912977982988e-22], [-1.3663656361131018e-27, -1.4475580002303218e-26, -5.6677528933045977e-26, -1.9562702391421299e-25, -7.8257024662674188e-25, -5.0594499655974371e-24]],
        [[1.2680100760980509e-3, 1.1654804516421229e-2, 3.3844596178681898e-2, 7.1398895598880014e-2, 1.3252991024344040e-1, 2.4077638828424400e-1], [-3.2559658343359402e-5, -3.0237377778216244e-4, -8.9732818789116892e-4, -1.9617746489605136e-3, -3.8491880042780551e-3, -7.6614340818707128e-3], [4.1802954543490438e-7, 3.9224124849728231e-6, 1.1895516089673845e-5, 2.6951115567146922e-5, 5.5897752684894047e-5, 1.2189229311296883e-4], [-5.3670311590401827e-9, -5.0881792115434770e-8, -1.5769403541444434e-7, -3.7025793492569925e-7, -8.1174490613316024e-7, -1.9392885146001337e-6], [6.8906668862699248e-11, 6.6004194581697810e-10, 2.0904859123244138e-9, 5.0866517207381635e-9, 1.1788126731098331e-8, 3.0853795976866458e-8], [-8.8468445087277114e-13, -8.5621074283192234e-12, -2.7712724442243326e-11, -6.9881083664757943e-11, -1.7118670013017105e-10, -4.9087937097294754e-10], [1.1358357478773641e-14, 1.1106821934347763e-13, 3.6737635565121397e-13, 9.6003542649514783e-13, 2.4859663430747259e-12, 7.8098188316015839e-12], [-1.4582858835745748e-16, -1.4407842287813616e-15, -4.8701594449917117e-15, -1.3189091693706951e-14, -3.6101102796660722e-14, -1.2425307272750455e-13], [1.8722757421654671e-18, 1.8689947545842689e-17, 6.4561729820427400e-17, 1.8119345899370066e-16, 5.2425875621662571e-16, 1.9768481720642865e-15], [-2.4037923493511554e-20, -2.4244722551892340e-19, -8.5586868358066255e-19, -2.4892593301678537e-18, -7.6132644717983471e-18, -3.1451364609554660e-17], [3.0862001150255800e-22, 3.1450412887375460e-21, 1.1345904157842831e-20, 3.4197768600586837e-20, 1.1055951864714699e-19, 5.0038659935864025e-19], [-3.9623349352134177e-24, -4.0797679207821979e-23, -1.5040804523509951e-22, -4.6981337976719897e-22, -1.6055408259561855e-21, -7.9610773580761288e-21], [5.0872060295042374e-26, 5.2923078574924328e-25, 1.9939003270881620e-24, 6.4543614879467885e-24, 2.3315604525495641e-23, 1.2665957715090622e-22], [-6.5320720418954925e-28, -6.8653050250182671e-27, -2.6430819846434698e-26, -8.8660358873827096e-26, -3.3852869794373540e-25, -2.0146457207396547e-24]],
        [[1.2060434488985567e-3, 1.1079621455345788e-2, 3.2139486992866924e-2, 6.7677796809453583e-2, 1.2524997404240358e-1, 2.2636043594826250e-1], [-2.9455551784883583e-5, -2.7326940944148253e-4, -8.0920398593804635e-4, -1.7626532007739711e-3, -3.4380040886828477e-3, -6.7716747181351192e-3], [3.5970077684362801e-7, 3.3699784075414525e-6, 1.0187018402057125e-5, 2.2953955748192523e-5, 4.7185127997704579e-5, 1.0128885442399309e-4], [-4.3925386224918357e-9, -4.1558820983684018e-8, -1.2824373795385093e-7, -2.9891534208693388e-7, -6.4759559521429960e-7, -1.5150509227871261e-6], [5.3640127550990171e-11, 5.1250642962247200e-10, 1.6144524016030876e-9, 3.8925918789394031e-9, 8.8879711200818264e-9, 2.2661716451345278e-8], [-6.5503425944931728e-13, -6.3202668936997145e-12, -2.0324240377178467e-11, -5.0690845876951025e-11, -1.2198358237020893e-10, -3.3896774345803790e-10], [7.9990466212890870e-15, 7.7941995063393199e-14, 2.5586059180135642e-13, 6.6011591649846372e-13, 1.6741722229776343e-12, 5.0701866009009699e-12], [-9.7681527227710605e-17, -9.6118640187663730e-16, -3.2210129983693285e-15, -8.5962862855356578e-15, -2.2977293974541828e-14, -7.5838461517583753e-14], [1.1928522501729136e-18, 1.1853421231936216e-17, 4.0549131316137898e-17, 1.1194418443106555e-16, 3.1535348104800886e-16, 1.1343709212427582e-15], [-1.4566689639563344e-20, -1.4617726032960010e-19, -5.1047047970005856e-19, -1.4577807219437552e-18, -4.3280909456120093e-18, -1.6967609326298638e-17], [1.7788325996006343e-22, 1.8026686987210881e-21, 6.4262809605065957e-21, 1.8983787710303431e-20, 5.9401187415421469e-20, 2.5379684971671584e-19], [-2.1722473396671319e-24, -2.2230642242483198e-23, -8.0900047933527426e-23, -2.4721426642157086e-22, -8.1525575419345978e-22, -3.7962237043568327e-21], [2.6526814357838780e-26, 2.7415072441457733e-25, 1.0184479403273292e-24, 3.2193251543847884e-24, 1.1189043335321524e-23, 5.6782887167047825e-23], [-3.2401449193068011e-28, -3.3812550550035619e-27, -1.2821905677830384e-26, -4.1922899950622236e-26, -1.5354718290385741e-25, -8.4917382920175942e-25]],
        [[1.1498527176800687e-3, 1.0558555686800609e-2, 3.0597992794560404e-2, 6.4325463147410921e-2, 1.1872843083671437e-1, 2.1357386185026680e-1], [-2.6775129515294577e-5, -2.4817399282057528e-4, -7.3345327451438296e-4, -1.5923825425290653e-3, -3.0893623652094657e-3, -6.0283979243880271e-3], [3.1173886426394864e-7, 2.9166077510725184e-6, 8.7906698571336711e-6, 1.9709785500809028e-5, 4.0193236600164371e-5, 8.5079656330427673e-5], [-3.6295293898415870e-9, -3.4276761545140597e-8, -1.0535896317087496e-7, -2.4395874365145588e-7, -5.2292223359406998e-7, -1.2007415588841546e-6], [4.2258072707193422e-11, 4.0282975370630037e-10, 1.2627605519087567e-9, 3.0196101627566579e-9, 6.8033252735335280e-9, 1.6946240187337417e-8], [-4.9200447692321473e-13, -4.7341639978845595e-12, -1.5134585264196133e-11, -3.7375358630516018e-11, -8.8512654088886921e-11, -2.3916475145059566e-10], [5.7283351985732779e-15, 5.5637173154808266e-14, 1.8139279911222037e-13, 4.6261515807206404e-13, 1.1515677435469474e-12, 3.3753669075908601e-12], [-6.6694157647538945e-17, -6.5386307657300615e-16, -2.1740501636079995e-15, -5.7260396239595265e-15, -1.4982132008447643e-14, -4.7637043886095921e-14], [7.7651019189999485e-19, 7.6843753674483836e-18, 2.6056679962016708e-17, 7.0874309246116826e-17, 1.9492060347844472e-16, 6.7230852595669050e-16], [-9.0407930678875553e-21, -9.0308853494842805e-20, -3.1229756424557272e-19, -8.7724990412133849e-19, -2.5359569411722915e-18, -9.4883879687135169e-18], [1.0526061361994442e-22, 1.0613340223841092e-21, 3.7429852450521106e-21, 1.0858199571334435e-20, 3.2993318779896525e-20, 1.3391099884779686e-19], [-1.2255337270794019e-24, -1.2473083443844061e-23, -4.4860862902976355e-23, -1.3439784379581354e-22, -4.2924982498154212e-22, -1.8899053870635823e-21], [1.4268830652401270e-26, 1.4658784495459671e-25, 5.3767387245361155e-25, 1.6635201537781051e-24, 5.5846363671366263e-24, 2.6672523390614757e-23], [-1.6623130557250982e-28, -1.7236610779079108e-27, -6.4458881075749796e-27, -2.0592580024709961e-26, -7.2655413530231808e-26, -3.7637782157218317e-25]],
        [[1.0986660967676372e-3, 1.0084310925083838e-2, 2.9197636158071237e-2, 6.1289650543097584e-2, 1.1285260424465766e-1, 2.0215510584434595e-1], [-2.4444644092092525e-5, -2.2638359924352099e-4, -6.6786323913194060e-4, -1.4456460886463809e-3, -2.7911916784104424e-3, -5.4011239124479493e-3], [2.7193913899185833e-7, 2.5410528486865872e-6, 7.6383119470530564e-6, 1.7049310895882917e-5, 3.4517373514650236e-5, 7.2152863504913929e-5], [-3.0252391909258867e-9, -2.8522161505491724e-8, -8.7358917188384531e-8, -2.0107203575437117e-7, -4.2686035630071694e-7, -9.6388007317521639e-7], [3.3654854524592432e-11, 3.2014827923230356e-10, 9.9911871434779156e-10, 2.3713547022108784e-9, 5.2787841376123123e-9, 1.2876339903003116e-8], [-3.7439989421954691e-13, -3.5935186986326543e-12, -1.1426861017603275e-11, -2.7966709058275382e-11, -6.5280276231312702e-11, -1.7201323474972467e-10], [4.1650835450552417e-15, 4.0335611574699162e-14, 1.3068832646264399e-13, 3.2982700345124024e-13, 8.0729091278281520e-13, 2.2979008904667872e-12], [-4.6335272004957329e-17, -4.5274887861974080e-16, -1.4946745783724369e-15, -3.8898338728000801e-15, -9.9833924653202333e-15, -3.0697338551250654e-14], [5.1546563437399769e-19, 5.0819000652009599e-18, 1.7094503814547019e-17, 4.5874981125424338e-17, 1.2345998640445129e-16, 4.1008147829153412e-16], [-5.7343964699794356e-21, -5.7042014883759243e-20, -1.9550881837095828e-19, -5.4102924754183037e-19, -1.5267724168874541e-18, -5.4782214607039828e-18], [6.3793395071083332e-23, 6.4027065084891237e-22, 2.2360226697468887e-21, 6.3806597739388599e-21, 1.8880886680878761e-20, 7.3182798932932954e-20], [-7.0968184795853370e-25, -7.1867461435034017e-24, -2.5573256481505913e-23, -7.5250678344848458e-23, -2.3349116835585150e-22, -9.7763882846831752e-22], [7.8950247100408608e-27, 8.0668669648867786e-26, 2.9248181630904214e-25, 8.8747812557251972e-25, 2.8874851517092144e-24, 1.3060154518370443e-23], [-8.7925415202797752e-29, -9.0634835459189651e-28, -3.3474396870931504e-27, -1.0470733923422916e-26, -3.5713395421976920e-26, -1.7445681457845682e-25]],
        [[1.0518434701556426e-3, 9.6508463779506550e-3, 2.7919877574422478e-2, 5.8527541047720692e-2, 1.0753109133634606e-1, 1.9189576482184480e-1], [-2.2405724203925871e-5, -2.0734230043487306e-4, -6.1069453932702339e-4, -1.3182979382990510e-3, -2.5341989861092249e-3, -4.8669082258386032e-3], [2.3863649456706024e-7, 2.2273087699254315e-6, 6.6788942639473544e-6, 1.4846937211205543e-5, 2.9861895854423915e-5, 6.1717869856914711e-5], [-2.5416440915253436e-9, -2.3926156631723956e-8, -7.3044092776964796e-8, -1.6720920070457984e-7, -3.5187955993524582e-7, -7.8265200059709922e-7], [2.7070271459130700e-11, 2.5701913398605877e-10, 7.9885071970827905e-10, 1.8831437354744664e-9, 4.1463953026907016e-9, 9.9249075747226866e-9], [-2.8831715632980046e-13, -2.7609463672638292e-12, -8.7366746319517093e-12, -2.1208344478137298e-11, -4.8859314275996479e-11, -1.2585899006408654e-10], [3.0707775782597203e-15, 2.9658588933385841e-14, 9.5549120431990366e-14, 2.3885265209987238e-13, 5.7573685508746773e-13, 1.5960335409364691e-12], [-3.2705909891661915e-17, -3.1859796624419686e-16, -1.0449781867735103e-15, -2.6900067317349360e-15, -6.7842320592872864e-15, -2.0239500273259198e-14], [3.4834061229779216e-19, 3.4224374033065487e-18, 1.1428461150612775e-17, 3.0295398243065433e-17, 7.9942432428202614e-17, 2.5665962575628412e-16], [-3.7100689930064491e-21, -3.6764446169271712e-20, -1.2498799106524514e-19, -3.4119288397380931e-19, -9.4200676608714967e-19, -3.2547327060498735e-18], [3.9514806613439169e-23, 3.9493037950273149e-22, 1.3669380074408259e-21, 3.8425830595998464e-21, 1.1100196984232796e-20, 4.1273671138004763e-20], [-4.2086000728604685e-25, -4.2424137802891084e-24, -1.4949591334678098e-23, -4.3275943525635095e-23, -1.3079987709896823e-22, -5.2339656156760936e-22], [4.4825612258996101e-27, 4.5573501700952197e-26, 1.6349904356687121e-25, 4.8738641267569523e-25, 1.5412962144906509e-24, 6.6372698765277457e-24], [-4.7792556862237494e-29, -4.9028057429532857e-28, -1.7903198243990863e-27, -5.4934864759403367e-27, -1.8169607841125502e-26, -8.4172191100779665e-26]],
        [[1.0088494553221858e-3, 9.2531177840798849e-3, 2.6749289080979316e-2, 5.6003708233513800e-2, 1.0268896714700311e-1, 1.8262773799551506e-1], [-2.0611681735351006e-5, -1.9060633616552179e-4, -5.6056473107079545e-4, -1.2070665998819445e-3, -2.3111359079788644e-3, -4.4082116655030778e-3], [2.1055739373112167e-7, 1.9631639969476825e-6, 5.8736667125840653e-6, 1.3008154482158496e-5, 2.6007415078500829e-5, 5.3202022598436372e-5], [-2.1509363779280965e-9, -2.0219752167969855e-8, -6.1545007629388290e-8, -1.4018454578086223e-7, -2.9266372294693192e-7, -6.4208695574093191e-7], [2.1972761060114747e-11, 2.0825482658085698e-10, 6.4487621607577741e-10, 1.5107221322394514e-9, 3.2933705433864229e-9, 7.7492478405280478e-9], [-2.2446141762219734e-13, -2.1449359237412130e-12, -6.7570928996299831e-12, -1.6280548958697612e-11, -3.7060587580962730e-11, -9.3524469788727211e-11], [2.2929720968213801e-15, 2.2091925514961760e-14, 7.0801656683931365e-14, 1.7545005050242962e-13, 4.1704604257312471e-13, 1.1287323143179434e-12], [-2.3423718394450320e-17, -2.2753741384840734e-16, -7.4186853187467695e-16, -1.8907667241072998e-15, -4.6930556955132548e-15, -1.3622495163710681e-14], [2.3928358490838011e-19, 2.3435383514098640e-18, 7.7733904030330582e-18, 2.0376162872298895e-17, 5.2811367361971176e-17, 1.6440778041996511e-16], [-2.4443870543177285e-21, -2.4137445845410273e-20, -8.1450547856249543e-20, -2.1958711675409458e-19, -5.9429094892681867e-19, -1.9842119918456137e-18], [2.4970488832294167e-23, 2.4860540114555525e-22, 8.5344893308213805e-22, 2.3664171778788930e-21, 6.6876081732070604e-21, 2.3947146653563225e-20], [-2.5508448723173129e-25, -2.5605291066356797e-24, -8.9425424635050228e-24, -2.5502087310094721e-23, -7.5256237109564305e-23, -2.8901439014575117e-22], [2.6058492466397377e-27, 2.6372810396297196e-26, 9.3702842300811077e-26, 2.7483156067958964e-25, 8.4687215846915457e-25, 3.4880819226221011e-24], [-2.6685465203150181e-29, -2.7245283514070695e-28, -9.8429415108857801e-28, -2.9667790833193149e-27, -9.5382298994422853e-27, -4.2108831648622452e-26]],
        [[9.6923282087473489e-4, 8.8868800205178318e-3, 2.5672927645451644e-2, 5.3688587887151480e-2, 9.8264230720586585e-2, 1.7421393133967685e-1], [-1.9024813743226382e-5, -1.7581801028987719e-4, -5.1636385547878510e-4, -1.1093426501116737e-3, -2.1162816568297226e-3, -4.0114410609169282e-3], [1.8671650926853701e-7, 1.7391915200229149e-6, 5.1928559712229309e-6, 1.1460919012653925e-5, 2.2788801266703798e-5, 4.6183618214307209e-5], [-1.8325043968349152e-9, -1.7204080164100064e-8, -5.2222387085676917e-8, -1.1840585467564003e-7, -2.4539713865464280e-7, -5.3171081388825091e-7], [1.7984871169531628e-11, 1.7018273771762731e-10, 5.2517877022574495e-10, 1.2232829152696616e-9, 2.6425152843766165e-9, 6.1215729849014640e-9], [-1.7651013091336616e-13, -1.6834474113589858e-12, -5.2815038930204940e-12, -1.2638066714605668e-11, -2.8455454152590288e-11, -7.0477513021488438e-11], [1.7323352511879593e-15, 1.6652659516581092e-14, 5.3113882269080381e-14, 1.3056728602116929e-13, 3.0641747876254327e-13, 8.1140580271526814e-13], [-1.7001774385297950e-17, -1.6472808541807505e-16, -5.3414416553243600e-16, -1.3489259523556664e-15, -3.2996019247384601e-15, -9.3416942291830224e-15], [1.6686165801350161e-19, 1.6294899981876166e-18, 5.3716651350546996e-18, 1.3936118919122010e-17, 3.5531174349790661e-17, 1.0755068644999772e-16], [-1.6376415945765361e-21, -1.6118912858643308e-20, -5.4020596283837020e-20, -1.4397781449055444e-19, -3.8261110869664134e-19, -1.2382282990781528e-18], [1.6072416049825065e-23, 1.5944826424458697e-22, 5.4326261022128884e-22, 1.4874737495967065e-21, 4.1200794281977493e-21, 1.4255690698460491e-20], [-1.5774056057610971e-25, -1.5772617143624544e-24, -5.4633644984409626e-24, -1.5367491751551910e-23, -4.4366336538421108e-23, -1.6412539427975684e-22], [1.5482253679451855e-27, 1.5602915061371090e-26, 5.4944514218690446e-26, 1.5876938574921299e-25, 4.7775794272341641e-25, 1.8895843332969318e-24], [-1.5268772599102006e-29, -1.5522599160458276e-28, -5.5513973184646864e-28, -1.6451130706309043e-27, -5.1532056897525017e-27, -2.1768503985158789e-26]],
        [[9.3261057530620152e-4, 8.5485348496783998e-3, 2.4679854142636548e-2, 5.1557313383440500e-2, 9.4205133121603253e-2, 1.6654142195256382e-1], [-1.7614404376003840e-5, -1.6268640940941291e-4, -4.7719243547089401e-4, -1.0230242100521421e-3, -1.9450723486139845e-3, -3.6659298328374012e-3], [1.6634340727881732e-7, 1.5480353225396753e-6, 4.6133299482765261e-6, 1.0149661276657562e-5, 2.0080150178542280e-5, 4.0347444442725827e-5], [-1.5708807720357324e-9, -1.4730261541391311e-8, -4.4600064103411849e-8, -1.0069715165942305e-7, -2.0729945160144393e-7, -4.4406640260183396e-7], [1.4834771274195361e-11, 1.4016515122007550e-10, 4.3117785641401390e-10, 9.9903987689134727e-10, 2.1400767550125479e-9, 4.8874215614735429e-9], [-1.4009366126017231e-13, -1.3337352878183173e-12, -4.1684770548919856e-12, -9.9117071254882891e-12, -2.2093297796804859e-11, -5.3791255946409294e-11], [1.3229886435404062e-15, 1.2691099053421702e-14, 4.0299381563037546e-14, 9.8336353146531946e-14, 2.2808238367854264e-13, 5.9202980137848635e-13], [-1.2493776914619801e-17, -1.2076159089051756e-16, -3.8960035835087097e-16, -9.7561784541561636e-16, -2.3546314462845613e-15, -6.5159156363525589e-15], [1.1798624451864629e-19, 1.1491015689825069e-18, 3.7665203122189850e-18, 9.6793317001963253e-18, 2.4308274748847870e-17, 7.1714559775871139e-17], [-1.1142150201213820e-21, -1.0934225080439743e-20, -3.6413404039705503e-20, -9.6030902473056453e-20, -2.5094892120082870e-19, -7.8929476237977090e-19], [1.0522202147738577e-23, 1.0404413450348661e-22, 3.5203208373794477e-22, 9.5274493263115350e-22, 2.5906964482012279e-21, 8.6870256732213973e-21], [-9.9367429713648452e-26, -9.9002693006803601e-25, -3.4033224245773844e-24, -9.4524023400791069e-24, -2.6745312037117160e-23, -9.5609922667430490e-23], [9.3846186075030768e-28, 9.4211474456254203e-27, 3.2903712353211618e-26, 9.3783390633954894e-26, 2.7611461476832786e-25, 1.0522993141033432e-24], [-8.9343339854425475e-30, -9.0382681705556507e-29, -3.2039022193476237e-28, -9.3511008232823582e-28, -2.8590854829547678e-27, -1.1595072015391042e-26]],
    ],
    [
        [[1.0884908450183171e-2, 1.0442146330041558e-1, 3.3262827195427818e-1, 8.2307128800208992e-1, 1.9901401420713067e+0, 5.7297678645580646e+0, 32.732026115628256e+0], [-9.0038853316641164e-4, -8.6950676869205906e-3, -2.8045692240308164e-2, -7.0568178491705215e-2, -1.7379394934411086e-1, -5.0870903451591588e-1, -2.9379107461118308e+0], [2.7739885651615384e-5, 2.5561128309182431e-4, 7.4830594921043508e-4, 1.6180313355942245e-3, 3.2410961647951168e-3, 7.4539577081398377e-3, 3.5083231628465601e-2], [-7.5227208720528694e-7, -6.0663113624453743e-6, -1.3104400777125331e-5, -1.5740837883637213e-5, -8.3490039944700221e-6, 8.9026774324269246e-6, 2.5989548065906225e-5], [1.8857683540399440e-8, 1.1533548148419229e-7, 9.0166547051873851e-8, -1.9493474171140154e-7, -4.6693908243140014e-7, -2.1913416609904335e-7, 4.4639416467972734e-7], [-4.4579191851781533e-10, -1.5392880066316939e-9, 2.6219760498070433e-9, 5.8053043191495603e-9, -4.6907575715207710e-9, -1.2192237078360005e-8, 5.5157060817069611e-9], [1.0008261753278695e-11, 3.6500018039080975e-12, -9.0404410608545723e-11, 7.5222741384900283e-11, 1.6904880109954538e-10, -2.8082677545452180e-10, -4.6166323812393127e-12], [-2.1369971977068934e-13, 5.5925351035782331e-13, 5.1150635932740619e-13, -3.6832807687776403e-12, 5.1950883701889990e-12, -1.9591905235340682e-12, -3.3183495197683392e-12], [4.3156021006829529e-15, -2.0483027998289399e-14, 4.1174423622975470e-14, -2.9735514594033497e-14, -3.6726524138351805e-14, 1.1073821931622455e-13, -1.4407440940809187e-13], [-8.1532320833898762e-17, 4.1022426799377890e-16, -1.2510540116863762e-15, 2.6794370287638371e-15, -4.1742086660693299e-15, 4.8355999112161656e-15, -4.4620573734472655e-15], [1.4002638848883749e-18, -3.1070879121383062e-18, 1.8375606383178797e-18, 6.2885404492988155e-18, -3.3499919964531048e-17, 8.0321669877266274e-17, -1.1463685261870914e-16], [-2.0638375908476505e-20, -1.2665497421829635e-19, 8.1014892484160421e-19, -2.0609076971574121e-18, 2.6993293333333712e-18, -8.5945826665970266e-19, -2.5740290898471907e-18], [2.0260881600027991e-22, 6.3973896751855635e-21, -2.0900195771003430e-20, 6.9715667758993555e-21, 6.5243592035282374e-20, -8.9859037606423893e-20, -5.4000386243623628e-20], [1.0052924274857012e-24, -1.5922491669072370e-22, -8.6215743953224653e-23, 1.5930417321905745e-21, -1.2545830677402828e-21, -2.4026060786512785e-21, -9.5870046913877807e-22]],
        [[9.2806859820909222e-3, 8.8866333113637137e-2, 2.8204484479354004e-1, 6.9424971218590533e-1, 1.6680704403823902e+0, 4.7722639355393208e+0, 27.137949166299792e+0], [-7.1005110194135141e-4, -6.9122763140415215e-3, -2.2660477835219639e-2, -5.8423226941842239e-2, -1.4839840789915374e-1, -4.4873061577135669e-1, -2.6558678334048405e+0], [2.0266058792656821e-5, 1.9289894136051801e-4, 6.0107638687345324e-4, 1.4144787836387192e-3, 3.0938255427592817e-3, 7.5304911368356826e-3, 3.5441467162117360e-2], [-5.1061001530948656e-7, -4.4583138196680999e-6, -1.1353075474064903e-5, -1.7868728587983090e-5, -1.6304860614696776e-5, 3.0703797448503813e-6, 3.3965123145116753e-5], [1.1929573403401178e-8, 8.6365482786605581e-8, 1.2266844226692021e-7, -6.9313438546784177e-8, -5.0968829066819420e-7, -5.3199865788181757e-7, 5.4461647982452209e-7], [-2.6415791077911284e-10, -1.3252432249983381e-9, 7.3331742199236510e-10, 6.3522846105467236e-9, 8.3764604842438382e-10, -1.9010405081833996e-8, 3.5825321605120773e-9], [5.5844412535083625e-12, 1.2140609403433197e-11, -6.3987771052538194e-11, -2.7335192240789130e-11, 2.7518287292737275e-10, -2.5635839168195997e-10, -1.9405088670708599e-10], [-1.1335604252988179e-13, 1.0953750809765951e-13, 1.1750143537975295e-12, -3.2037428002588510e-12, 1.6307137322786557e-12, 4.8228370771512393e-12, -1.1652250816018300e-11], [2.1960769218897018e-15, -8.6610559276152950e-15, 3.4356790356968985e-15, 5.2162494900290068e-14, -1.7665160250218018e-13, 3.1898883229327065e-13, -4.2143040962540807e-13], [-4.0807779767138897e-17, 2.3992221810755648e-16, -7.4604860269004774e-16, 1.4600042470851016e-15, -2.5812489835606037e-15, 5.6332375564880358e-15, -1.2008540189877888e-14], [7.0500326071791872e-19, -4.2852101846940793e-18, 1.7312730081078119e-17, -5.4384181871160883e-17, 1.1564626614588085e-16, -8.7886192948106465e-17, -2.6806929512650285e-16], [-1.1219048822984750e-20, 3.2288304975633779e-20, -1.1241746787779819e-20, -3.7206300487144035e-19, 2.9712261438463014e-18, -7.1506090489801872e-18, -2.6487640618799983e-18], [1.7583877142702064e-22, 1.2245659457451250e-21, -9.8718792661714545e-21, 4.6997453484976358e-20, -6.8500011094377942e-20, -1.2501347290404534e-19, 1.9027022871534646e-19], [-9.8419670915828086e-25, -4.7264588176459194e-23, 3.2278941683641373e-22, -2.1421174726782804e-22, -2.8144009636526136e-21, 3.0596093667982498e-21, 1.4817598964835006e-20]],
        [[8.0053617051933740e-3, 7.6430877135250539e-2, 2.4112506286974917e-1, 5.8803290471831321e-1, 1.3953091093776289e+0, 3.9350409407729533e+0, 22.111142618395940e+0], [-5.6954610944879296e-4, -5.5615007395529059e-3, -1.8362820528242753e-2, -4.7974660946650051e-2, -1.2456543985473235e-1, -3.8851476028856013e-1, -2.3705545152059747e+0], [1.5130583009672030e-5, 1.4686857701344237e-4, 4.7685985853670435e-4, 1.1974028841653570e-3, 2.8509654235860926e-3, 7.5028140145226418e-3, 3.5902494863512086e-2], [-3.5567192232090556e-7, -3.2721030715715326e-6, -9.3453519392466714e-6, -1.8023656370929868e-5, -2.3963724016860356e-5, -8.7488588154256404e-6, 4.2854947478414167e-5], [7.7655089350121497e-9, 6.2890762250525497e-8, 1.2461852114722249e-7, 4.5031418137447962e-8, -4.2672584362648247e-7, -9.5617999560396222e-7, 5.3342298753615962e-7], [-1.6146206095703976e-10, -1.0215008194944257e-9, -4.1534377130280147e-10, 4.8418526827573674e-9, 7.3022322673130290e-9, -2.2242645938081664e-8, -6.9879114850259637e-9], [3.2073692055789898e-12, 1.2410009462368964e-11, -3.2669763146003371e-11, -8.8767051812540549e-11, 2.3521636647817681e-10, 4.3302284104307745e-11, -7.8880620694269791e-10], [-6.1969450587245861e-14, -5.8981244947787715e-14, 9.8181861852130196e-13, -1.1091160413594876e-12, -4.4361565803828106e-12, 1.6911448927962967e-11, -3.4053621507690186e-11], [1.1367166764250471e-15, -2.6606092569642151e-15, -1.1948679891427625e-14, 6.7013469958051155e-14, -1.6670227127232961e-13, 3.7336825252239418e-13, -1.0250258350079912e-12], [-2.0211969027627029e-17, 1.0749758871265510e-16, -1.5032931086697696e-16, -4.7484751028669762e-16, 3.2957157503993457e-15, -4.9595294849922827e-15, -1.8838348175879346e-14], [3.7449598991859040e-19, -2.2050057604025532e-18, 1.1372256676608525e-17, -3.1655854376893807e-17, 1.3858601088560638e-16, -4.2836954184717758e-16, 1.7809827848255856e-16], [-4.4631472169215071e-21, 5.1184817251268588e-20, -1.7438939417999999e-19, 1.0662226614873887e-18, -2.2751079233109631e-18, -4.9861149840214143e-18, 3.1949651682999925e-17], [9.1299555098693069e-23, -2.3772603666749537e-22, 5.9277841026236970e-22, 6.3266514711650158e-21, -1.1005375345362487e-19, 2.8183534801936953e-19, 1.2563968807620258e-18], [-2.5726823945882776e-24, -2.2247972910838422e-23, 5.0975333358369695e-23, -9.7898315180584245e-22, 1.6011793318895766e-21, 1.0064445165830055e-20, 1.3073313431399788e-20]],
        [[6.9751433018800883e-3, 6.6369600023842883e-2, 2.0788253989551980e-1, 5.0099090890614220e-1, 1.1680018215424485e+0, 3.2174963726052997e+0, 17.658972084426864e+0], [-4.6368238429006752e-4, -4.5279576747564463e-3, -1.4963487304473670e-2, -3.9241752882601406e-2, -1.0301120031988572e-1, -3.2920482941428855e-1, -2.0811516370788573e+0], [1.1513540964758479e-5, 1.1301722122640205e-4, 3.7629047412739228e-4, 9.8824375879547238e-4, 2.5281103122717560e-3, 7.2920285142567124e-3, 3.6458957293036304e-2], [-2.5359896172626856e-7, -2.4138023000919202e-6, -7.4519784877187538e-6, -1.6650678631376137e-5, -2.9367604453200330e-5, -2.7368131813539374e-5, 4.8845302591750408e-5], [5.1842286727552385e-9, 4.5268948578530815e-8, 1.1046341809823502e-7, 1.1920974000678965e-7, -2.3682131555665843e-7, -1.3464570807452634e-6, 1.0575993788746310e-7], [-1.0177392542499458e-10, -7.5002898615417490e-10, -9.1495527472576099e-10, 2.5588385606091691e-9, 1.0995620330588428e-8, -1.4459481847006518e-8, -4.1557027996321549e-8], [1.8907626081482048e-12, 1.0050780829894744e-11, -1.0803375859217261e-11, -9.3584358798460417e-11, 6.0262283224992548e-11, 6.3264974844512724e-10, -2.2723972601210753e-9], [-3.4673677324156184e-14, -9.5193142141894675e-14, 5.8627075623910231e-13, 6.0771216947039943e-13, -7.0750590652491663e-12, 2.2570817113084529e-11, -7.2499284302466252e-11], [6.3928473928456445e-16, 1.0282792586783259e-16, -1.0931079135112829e-14, 3.8040750044554460e-14, 1.6444843146348858e-14, -1.1873336002907372e-13, -1.0737556734629631e-12], [-8.3988500858191156e-18, 5.6763187676571559e-17, 1.6033717009007263e-16, -8.7302570537183861e-16, 5.7052775948347605e-15, -2.1024981994381300e-14, 3.3725266076044902e-14], [2.2158690547269565e-19, -6.1988836599951829e-19, 4.2605137316983288e-18, 6.8245754821468289e-18, -3.3831764619580075e-17, -2.1827523556673088e-16, 2.7825943808827627e-15], [-3.7047629980477551e-21, 1.1977111010643886e-20, -1.6497689010322740e-19, 4.2799511256270148e-19, -4.3898842350492090e-18, 1.5668947149005885e-17, 7.2996742902069610e-17], [-5.6570890884919823e-23, -1.3154858781274331e-21, -1.0952231374492833e-21, -2.5072686611633446e-20, 3.1322065774045724e-20, 4.0140085509712891e-19, -5.1035874607095406e-19], [-2.1247237606020966e-24, -1.1719643351170000e-23, -5.1571169410066780e-23, -1.0305953535905055e-22, 2.6981794135758333e-21, -9.7599953741655598e-21, -9.5421985315371521e-20]],
        [[6.1311526791047021e-3, 5.8134089016260451e-2, 1.8070296377028982e-1, 4.2980560305936255e-1, 9.8105400729278025e-1, 2.6161139334867538e+0, 13.790160916813787e+0], [-3.8247685504754638e-4, -3.7284285481279174e-3, -1.2282269601356339e-2, -3.2099476197585129e-2, -8.4243476426453724e-2, -2.7256412326604438e-1, -1.7871926900606846e+0], [8.9080466251302613e-6, 8.7942437508763154e-5, 2.9683542149613488e-4, 8.0119428336583131e-4, 2.1602993960924610e-3, 6.8280284463622550e-3, 3.7016222317951537e-2], [-1.8476112761468642e-7, -1.7972745288110680e-6, -5.8400971541199357e-6, -1.4448031208223665e-5, -3.1382879543769146e-5, -5.0202086861618968e-5, 4.0188102682217258e-5], [3.5348489475691042e-9, 3.2473989607610902e-8, 9.0722606061141367e-8, 1.4990089180392829e-7, -1.7441551177747126e-8, -1.4379041692192433e-6, -1.4472471364277010e-6], [-6.5961496986474224e-11, -5.3870195992761528e-10, -1.0106394226232877e-9, 6.2792713531018600e-10, 1.0295999207404610e-8, 7.1571884731342016e-9, -1.2231161842772363e-7], [1.1709090632733118e-12, 7.7048354582420422e-12, 1.7293922273643228e-12, -6.3765064387124350e-11, -1.0343849260846168e-10, 1.0946900493749034e-9, -4.4170831224089907e-9], [-1.7721339100383136e-14, -6.4112859759512212e-14, 3.4634834335934177e-13, 1.3908547050727263e-12, -3.8575600549429134e-12, 6.5617182602194717e-12, -6.0950967250199174e-11], [4.4808016052752000e-16, 1.6522910274186668e-15, -4.0218254122114913e-15, 1.2936085619640345e-14, 1.5802181472586414e-13, -8.3399040700166031e-13, 2.6968057694073858e-12], [-3.8121925939015078e-18, 2.3475050227982281e-17, 1.6557174439941908e-16, -5.5891740060108432e-16, 1.3310014654590514e-15, -1.2989862643191788e-14, 1.8048370546309540e-13], [-1.7898842491387747e-20, -1.4803491747029038e-18, -4.4586999426129335e-18, 1.8314416258799747e-18, -1.5698958531102684e-16, 6.1304269798798135e-16, 3.2628434122539334e-15], [-6.9897385025504384e-21, -4.5635041461300050e-20, -2.2082351784758480e-19, -5.0908787099161216e-19, -6.8561898101852481e-19, 1.4355069659023693e-17, -1.0477957604829816e-16], [-3.0952917847653361e-23, -6.1963269300930975e-22, 2.8355630199982199e-22, -7.4991100073541421e-21, 9.6919425437122023e-20, -5.2727384996708807e-19, -6.9253741432888281e-18], [3.4157502836679555e-24, 4.0459636631324284e-23, 1.1558798889348486e-22, 6.3299537371268019e-22, -2.0181866356071543e-22, -1.6944967848500731e-20, -8.8177553612410124e-20]],
        [[5.4310608209514789e-3, 5.1318209751931182e-2, 1.5830760901895138e-1, 3.7149629127013857e-1, 8.2866323013388349e-1, 2.1234392203695548e+0, 10.513007301246612e+0], [-3.1921060410265480e-4, -3.1030814253220158e-3, -1.0164740359303330e-2, -2.6342171836233300e-2, -6.8457569902393086e-2, -2.2072047650787836e-1, -1.4897527496806021e+0], [6.9912752630184294e-6, 6.9168251358549531e-5, 2.3481241080751694e-4, 6.4239116098327425e-4, 1.7883136671247753e-3, 6.0969440145915089e-3, 3.7259178223630087e-2], [-1.3737186663748542e-7, -1.3543335836421282e-6, -4.5448922107552656e-6, -1.2018457837191502e-5, -3.0175772187109242e-5, -7.0631409436950112e-5, -8.6191901242971576e-6], [2.4642145862726059e-9, 2.3436078506076993e-8, 7.1652655126968597e-8, 1.5047132839727798e-7, 1.5788700644803714e-7, -1.0338851819438637e-6, -5.0137115688610544e-6], [-4.2340473834331099e-11, -3.6908272807881620e-10, -8.6347847465063256e-10, -4.0754720714319184e-10, 7.0896891912591061e-9, 3.2376797143673555e-8, -2.3248199440006652e-7], [8.5035563991165636e-13, 6.6716606056655168e-12, 1.0171519704671828e-11, -2.2213572911705069e-11, -1.4204782833570213e-10, 8.7277957971831687e-10, -3.8416033800616843e-9], [-6.3128158045078879e-15, -1.3240660582733840e-14, 2.6086735429189576e-13, 1.4517907115344721e-12, 7.7308076694070485e-13, -2.2178224580057744e-11, 1.3934046705908307e-10], [2.2569843883012687e-16, 9.3336237832083269e-16, -3.3868624903907696e-15, -1.1340857035700091e-14, 9.7393367726528689e-14, -7.9132183904882588e-13, 9.5038776625709041e-12], [-1.0294427398556531e-17, -7.5524736183626144e-17, -1.7659895144165824e-16, -9.1879270741683591e-16, -4.2866847328378376e-15, 1.4840510338898476e-14, 1.1845675265377578e-13], [-2.7261543979590281e-19, -3.2041477297067206e-18, -1.1148123422544452e-17, -1.6530710553890846e-17, -9.6094763379807208e-17, 5.3817541354773219e-16, -8.4872698116665613e-15], [-2.2006264391833845e-21, -7.7299540452630109e-21, -1.0443645718906543e-20, -5.9578758099524160e-20, 3.1162763372941835e-18, -1.6848227125143967e-17, -3.7373172027523988e-16], [2.6834679747491006e-22, 2.5125423915521863e-21, 9.3934803159249223e-21, 2.5749143404213727e-20, 5.8409190780700380e-20, -4.0206325387471701e-19, 4.1969072475801181e-19], [7.9328133995283977e-24, 7.8239216015044408e-23, 2.2691829471639155e-22, 6.0880888089096964e-22, -5.3357563254051646e-22, 2.3741562661111637e-20, 4.3549398426982643e-19]],
        [[4.8437847688295732e-3, 4.5618093426986170e-2, 1.3969687484206766e-1, 3.2352277826790362e-1, 7.0494461404136235e-1, 1.7279276701445293e+0, 7.8300371812155051e+0], [-2.6926139479965825e-4, -2.6088738137874973e-3, -8.4861216080240081e-3, -2.1739743860383932e-2, -5.5546924178902709e-2, -1.7556107361809179e-1, -1.1938335081767066e+0], [5.5548847174026119e-6, 5.4950412712273021e-5, 1.8663145966959438e-4, 5.1228715002987697e-4, 1.4454716996125118e-3, 5.1744847591181912e-3, 3.6509931856315046e-2], [-1.0366058849377805e-7, -1.0298157232739559e-6, -3.5211839939383236e-6, -9.6924415298834594e-6, -2.6688792461741809e-5, -8.1110326260818147e-5, -1.2907883806614606e-4], [1.8096632723360263e-9, 1.7629239229684549e-8, 5.7316895696770957e-8, 1.3992448261692043e-7, 2.6848502725818972e-7, -2.3946088694442047e-7, -1.0085917403189625e-5], [-2.3654166536423786e-11, -2.1340147233921433e-10, -5.5275800976987067e-10, -5.2866273117235323e-10, 4.1308791691361460e-9, 4.3613163946483640e-8, -2.4263423189262529e-7], [7.0428689126007508e-13, 6.1432682629780178e-12, 1.4430840656351425e-11, 7.5707921585009087e-12, -1.0346960651713764e-10, -1.9755512340155859e-12, 4.3231526907542252e-9], [-7.0222442437664910e-15, -4.9518753724515303e-14, -2.6413098473623318e-14, 4.5333415070241917e-13, 9.9472397671355974e-13, -3.6381612292232452e-11, 4.1813977395918679e-10], [-3.1823897753165121e-16, -3.7366419653429802e-15, -1.6340501170906916e-14, -5.2804005864781241e-14, -8.5772146767064731e-14, -6.2556392379363501e-14, 4.4343784674919330e-12], [-1.7732113211014943e-17, -1.5930983446729115e-16, -4.5345530242813293e-16, -1.1556138101475250e-15, -4.5803250811979315e-15, 2.0987080101409796e-14, -4.4981796005648613e-13], [7.4851906628600821e-20, 6.7035039179932482e-19, 2.8407234449366009e-18, 1.9109762837394979e-17, 1.0259414774143860e-16, -1.1793469715523221e-16, -1.5099376496291811e-14], [2.1576700863226703e-20, 2.1812235046510748e-19, 7.4447912094497781e-19, 1.9005020366564896e-18, 6.0550634783620745e-18, -2.0287976447614171e-18, 2.7746890002227361e-16], [6.8755456342344861e-22, 6.5197439975443007e-21, 2.0738700936865606e-20, 5.1051704611939994e-20, 6.8312285097088143e-20, 8.7038697007084993e-19, 2.4138310170253594e-17], [1.8950477655810634e-24, 1.4722789880122531e-23, 7.4528904086812496e-24, -1.3754701839543101e-22, -6.3379893492817558e-22, 5.2958120663239291e-21, 1.0409149577625872e-19]],
        [[4.3460891999013893e-3, 4.0804017727859424e-2, 1.2409440260994410e-1, 2.8379965506033393e-1, 6.0445551320111168e-1, 1.4151158814531763e+0, 5.7274003718744246e+0], [-2.2933622494323647e-4, -2.2141823843899027e-3, -7.1472206744537943e-3, -1.8069357798120990e-2, -4.5185763628975610e-2, -1.3805905514244148e-1, -9.1100522305397013e-1], [4.4718007242411012e-6, 4.4168125626461976e-5, 1.4957218464787607e-4, 4.0909628597697977e-4, 1.1532790265664360e-3, 4.2060117461349449e-3, 3.3861943758512604e-2], [-7.7666725395705333e-8, -7.7465753314548558e-7, -2.6752224874655999e-6, -7.5278865181974807e-6, -2.1864690993754226e-5, -7.8307919064854997e-5, -3.1959382920733404e-4], [1.4814856007062900e-9, 1.4633423148055379e-8, 4.9304709200211701e-8, 1.3108084374028540e-7, 3.2642371905748895e-7, 5.5151368166045887e-7, -1.2945530929315414e-5], [-1.0774460158988555e-11, -1.0066590295743196e-10, -2.8679129411756922e-10, -4.1397840787936116e-10, 1.5613822439680159e-9, 3.1789466995985486e-8, -5.2259022537007301e-10], [2.8669093346929862e-13, 2.3914748836629745e-12, 4.5229509792327901e-12, -7.4598273161837563e-12, -1.2995633394466810e-10, -9.3923119164984584e-10, 1.4986717089091996e-8], [-2.4450726166056480e-14, -2.3188910226215969e-13, -7.0892996195274611e-13, -1.5542777684418672e-12, -3.0362794903906851e-12, -2.6712679858720664e-11, 2.2750162559095983e-10], [-5.9611422130150384e-16, -5.9476930436773120e-15, -2.0481552386041582e-14, -5.5284873393883631e-14, -1.0769963558501398e-13, 6.8300773959906216e-13, -1.6846923181385957e-11], [1.2071668268826140e-17, 1.3223773078027874e-16, 5.3621505530420806e-16, 1.7794157158373612e-15, 5.1855512318727264e-15, 2.4053489206959137e-14, -5.1486733234214599e-13], [1.4910322970190646e-18, 1.4533801443829319e-17, 4.8019740472904914e-17, 1.2834016556061234e-16, 3.6224710709907062e-16, 3.4775979695751686e-16, 1.6467956092384254e-14], [2.8010646725820983e-20, 2.6550159011223294e-19, 8.0603213887421552e-19, 1.6622980263248184e-18, 1.9634062776973009e-18, 4.3920018264725664e-18, 8.5008682176638628e-16], [-1.2373691427449017e-21, -1.2531218343967522e-20, -4.4460075773242059e-20, -1.2965793400539073e-19, -4.1659520990342799e-19, -1.4287608033179539e-18, -1.2841471733383720e-17], [-8.7060236900160260e-23, -8.5249533250870869e-22, -2.8362204640581153e-21, -7.5124541939461033e-21, -1.9341400775475070e-20, -7.9727448745692787e-20, -1.2070747034706308e-18]],
        [[3.9205142190740674e-3, 3.6702275060419712e-2, 1.1090406061626344e-1, 2.5067231166908491e-1, 5.2254280608112882e-1, 1.1698022561001147e+0, 4.1617383745872820e+0], [-1.9690208824365305e-4, -1.8941856085464922e-3, -6.0660783037898948e-3, -1.5123048855396538e-2, -3.6919138341411940e-2, -1.0798041059751064e-1, -6.5883947742815911e-1], [3.6754130515786361e-6, 3.6213950210396786e-5, 1.2201171677169110e-4, 3.3099396172620619e-4, 9.2263190880763257e-4, 3.3357119426425776e-3, 2.8849920201077862e-2], [-5.5575105731543391e-8, -5.5600699852961289e-7, -1.9340515689370886e-6, -5.5238348780304835e-6, -1.6594296593199672e-5, -6.5820943157486225e-5, -5.0635582168261704e-4], [1.2715198505428194e-9, 1.2591251604417971e-8, 4.2790390304038201e-8, 1.1683611217149199e-7, 3.1864795300725556e-7, 9.1775672709423281e-7, -9.2092279630782647e-6], [-1.3421387983868723e-11, -1.3400905497017710e-10, -4.5870868197832007e-10, -1.2198626012444742e-9, -2.6991046321443156e-9, 3.6178323688917055e-9, 3.6359036202655190e-7], [-5.1171831376579475e-13, -5.1988405892396414e-12, -1.8835329150315779e-11, -5.9008343481021706e-11, -2.1657426060332847e-10, -1.2378022373152457e-9, 1.2264587668980406e-8], [-2.4379630077293381e-14, -2.2823020630884899e-13, -6.7479341399028381e-13, -1.3305300388388062e-12, -1.0198469024464667e-12, 1.0367826372725752e-11, -4.2670797557881151e-10], [9.2878962704396762e-16, 9.3028669028252012e-15, 3.2366870106825593e-14, 9.2219989927081535e-14, 2.8316601632728750e-13, 1.5804780032748941e-12, -1.7550633901079342e-11], [6.2861128780641528e-17, 6.1464116180257835e-16, 2.0308826294239018e-15, 5.2524805057761314e-15, 1.2472851191868522e-14, 1.1782089945953735e-14, 5.3193527883314243e-13], [-7.6250203619406357e-20, -1.4664658984857686e-18, -1.0216511942353047e-17, -5.2518430260367402e-17, -2.5572151679118811e-16, -1.7327298949647775e-15, 2.4274330925266471e-14], [-1.1745707994895522e-19, -1.1622588882864341e-18, -3.9497952458448706e-18, -1.0855339173201359e-17, -3.0590696973417498e-17, -8.8100923398769058e-17, -6.4993860632902274e-16], [-2.9224026455367402e-21, -2.7905252271538321e-20, -8.7064736314892275e-20, -1.9897673106004284e-19, -3.4358811330020181e-19, 3.3567264126472879e-19, -3.0770417344607305e-17], [1.3377230326596862e-22, 1.3557416349256152e-21, 4.8497968643727827e-21, 1.4544673477822826e-20, 4.7659067244538789e-20, 2.1731933665236522e-19, 8.0138479952212418e-19]],
        [[3.5542289401023633e-3, 3.3184738057945104e-2, 9.9682146644401998e-2, 2.2288513543235271e-1, 4.5551234552533387e-1, 9.7819971102196360e-1, 3.0542643505441761e+0], [-1.6984609172474772e-4, -1.6279927509357639e-3, -5.1720574865622276e-3, -1.2710847635396518e-2, -3.0253832999340956e-2, -8.4208571075746106e-2, -4.5421739522577082e-1], [3.1191232904173272e-6, 3.0636263723538740e-5, 1.0251788013945826e-4, 2.7485391410162480e-4, 7.5142137010779708e-4, 2.6316407461918494e-3, 2.2168093432770088e-2], [-3.8192759808625266e-8, -3.8409874608671613e-7, -1.3509125314946083e-6, -3.9313460479021290e-6, -1.2197381457091104e-5, -5.1971535103310560e-5, -5.8446120180352661e-4], [8.5025621575029640e-10, 8.3961642197640135e-9, 2.8417434714538162e-8, 7.7593257198893187e-8, 2.1696194045427155e-7, 7.4549266822162102e-7, -1.9577032636185055e-7], [-2.8740720040413644e-11, -2.8448948118493485e-10, -9.6475649460101902e-10, -2.6135561075778069e-9, -6.9353845065455880e-9, -1.7133551019092407e-8, 4.7373945340219530e-7], [-5.0659442750420704e-13, -4.8076766030216757e-12, -1.4909423141707579e-11, -3.5013676521127639e-11, -7.9577560271288508e-11, -3.0584425175979220e-10, -3.7507565893176118e-9], [2.9899859305504396e-14, 3.0374521400822853e-13, 1.0912017289367718e-12, 3.2894126215212750e-12, 1.0786464331841025e-11, 4.8847197396278931e-11, -5.6890818937521007e-10], [1.7985371726200570e-15, 1.7288197466740761e-14, 5.4852938907181830e-14, 1.3072487117288515e-13, 2.6311131810870282e-13, 1.8557525229252474e-13, 9.6145606816516931e-12], [-4.4693026205401760e-17, -4.6074877373970563e-16, -1.7007708304064426e-15, -5.3068391511328467e-15, -1.8014087403711525e-14, -8.7844168248412140e-14, 6.8882299118406275e-13], [-4.1601265531563555e-18, -4.0610290545095055e-17, -1.3362435024067605e-16, -3.4309047083703469e-16, -8.2008175245234256e-16, -1.2724081170742593e-15, -1.7308104015012507e-14], [3.7384389461281138e-20, 4.1871810078582193e-19, 1.7891157178257499e-18, 6.7169886644461922e-18, 2.7913533662592288e-17, 1.6048039645142863e-16, -7.7585261032838063e-16], [8.8569923251507713e-21, 8.7437171421648032e-20, 2.9515629234320297e-19, 7.9627640539760992e-19, 2.1209456164567705e-18, 5.3400119635084627e-18, 2.4631298317475640e-17], [4.2590354743447378e-23, 3.2405840345036518e-22, 3.4723710823733426e-22, -2.9945699619117509e-21, -3.0450078359960069e-20, -2.8720442638927709e-19, 7.5914862170957154e-19]],
        [[3.2381712538949150e-3, 3.0160559165617550e-2, 9.0111287985171363e-2, 1.9952508200308121e-1, 4.0058716648403065e-1, 8.2898647071356268e-1, 2.3013674816602734e+0], [-1.4654127430961943e-4, -1.3995108330201520e-3, -4.4105588515851812e-3, -1.0683705001230250e-2, -2.4779591044290085e-2, -6.5473713406395547e-2, -3.0431522888130602e-1], [2.7223239347046726e-6, 2.6635026785876735e-5, 8.8370058262578720e-5, 2.3335344527690182e-4, 6.2126942494219137e-4, 2.0681663749221296e-3, 1.5419823346862608e-2], [-2.9474926580807600e-8, -2.9782195238708213e-7, -1.0571076554796343e-6, -3.1168637949597413e-6, -9.8288586799624894e-6, -4.2744577517407711e-5, -5.2124036304938133e-4], [2.4543097037000703e-10, 2.4652616318801679e-9, 8.6942546254236039e-9, 2.5806567587455882e-8, 8.5439730790034644e-8, 4.3123081715750643e-7, 7.3440273563671384e-6], [-2.6774866654969362e-11, -2.5967695929114799e-10, -8.4304351932061987e-10, -2.1219983107123273e-9, -5.0093261655942535e-9, -1.0278564289796014e-8, 2.4426338401636319e-7], [7.1797361683097847e-13, 7.2530506683771835e-12, 2.5641902255759776e-11, 7.4207866978229923e-11, 2.1833112873707845e-10, 6.8959705108399520e-10, -1.2864259827300331e-8], [3.9498624631428912e-14, 3.7935273802454941e-13, 1.2035895159646490e-12, 2.8926333062869027e-12, 6.1856141599437959e-12, 9.8247202948641598e-12, -4.0133213360914302e-11], [-1.4413611758890121e-15, -1.4679120573619321e-14, -5.2868929906041307e-14, -1.5865311984321088e-13, -5.0412487590430598e-13, -2.0269591060291055e-12, 1.7541753088283790e-11], [-8.1400766711048510e-17, -7.7912925983538778e-16, -2.4453613585841305e-15, -5.6769613517570125e-15, -1.0436797628439049e-14, 6.1571645736577172e-15, -2.6054671103826650e-13], [3.3384329822573483e-18, 3.3916336972805194e-17, 1.2155172941948551e-16, 3.6176190903529401e-16, 1.1310288722527839e-15, 4.3380708915867602e-15, -1.9372868286694365e-14], [1.5833705343630541e-19, 1.5145039102546328e-18, 4.7384324627971904e-18, 1.0848986818048127e-17, 1.8304915957547649e-17, -4.2501631881535264e-17, 6.2854858674915572e-16], [-7.4202081035570062e-21, -7.5493149127509888e-20, -2.7149543790511330e-19, -8.1318346274087709e-19, -2.5618014695026319e-18, -9.4972517724962040e-18, 1.8002422650817327e-17], [-3.0714146352603098e-22, -2.9347935298151283e-21, -9.1384763696378073e-21, -2.0493300885090642e-20, -3.0162874945961520e-20, 1.4822733806541590e-19, -9.8053828480063674e-19]],
        [[2.9657722350880434e-3, 2.7563560455533156e-2, 8.1957946968722215e-2, 1.7990933872409663e-1, 3.5563728875061656e-1, 7.1303624604695033e-1, 1.7978759399919660e+0], [-1.2614393879720660e-4, -1.2003755546398287e-3, -3.7529984541676567e-3, -8.9619745839542230e-3, -2.0263592437886184e-2, -5.0872638649413531e-2, -2.0371408590667654e-1], [2.3782952508156576e-6, 2.3164140911390180e-5, 7.6092832072600838e-5, 1.9738872799575420e-4, 5.0921995396762208e-4, 1.5927233215928250e-3, 9.9782181994775484e-3], [-2.8637363391604717e-8, -2.8803502394725566e-7, -1.0120945106033455e-6, -2.9308397396064575e-6, -8.9538560693118924e-6, -3.6615720538566828e-5, -3.8082131236077296e-4], [-6.2546518711347991e-11, -4.7093300187130172e-10, -4.7510241286364075e-10, 4.3693985690252152e-9, 4.1935022076268980e-8, 3.8014682397957975e-7, 9.3272478433520552e-6], [-3.0684640635514514e-12, -2.5910270094482486e-11, -5.6851621375880446e-11, -2.2171986775568764e-11, 4.5094430926200966e-10, 3.4354534524835197e-9, -2.7040231457114065e-8], [9.6402578396254520e-13, 9.3399443817953387e-12, 3.0208900577072110e-11, 7.5132665858052777e-11, 1.7028370259940649e-10, 2.7680799031255973e-10, -8.2513511348776545e-9], [-2.1533449766837084e-14, -2.2119657424649405e-13, -8.0786885715266589e-13, -2.4519007100247232e-12, -7.7022175175809983e-12, -2.7581718682546924e-11, 2.8302687506179831e-10], [-1.4185759900119105e-15, -1.3515218242949745e-14, -4.1989686825852012e-14, -9.5805824722311579e-14, -1.7265001937852787e-13, 4.0292721744036093e-14, 1.7868740080322138e-12], [6.8860148338568855e-17, 6.9163902564065101e-16, 2.4181907426234602e-15, 6.8911188728424004e-15, 1.9942957892532281e-14, 6.4137718849869700e-14, -4.1719559801284024e-13], [1.5744649653033372e-18, 1.4306372944269001e-17, 3.9021056057157428e-17, 5.9721587891294837e-17, -6.7419660225298895e-17, -1.7639410720883370e-15, 9.0437330755141284e-15], [-1.6816080649689829e-19, -1.6666563996530939e-18, -5.6610340336043588e-18, -1.5319491826903755e-17, -4.0119006490871227e-17, -9.4323528536320225e-17, 3.3325566069559149e-16], [2.4060566479980558e-24, 2.7473551290880501e-21, 2.9700141602397705e-20, 1.8047754582911862e-19, 9.7908954306289140e-19, 6.0487305139152148e-18, -2.0736775568018372e-17], [3.3611101000303262e-22, 3.2931588653043704e-21, 1.0889166363643038e-20, 2.7885368561613133e-20, 6.3719249671817157e-20, 6.0169881398805481e-20, -2.0201965887324520e-21]],
        [[2.7314117795599872e-3, 2.5337102725915322e-2, 7.5022218394875663e-2, 1.6345426525624766e-1, 3.1885279593779215e-1, 6.2271852247027863e-1, 1.4575301365851064e+0], [-1.0850696469898606e-4, -1.0289894136778860e-3, -3.1928416632735260e-3, -7.5218849065470069e-3, -1.6606465735583915e-2, -3.9778655238220433e-2, -1.3972844152223022e-1], [2.0299745569839094e-6, 1.9677663319595422e-5, 6.3966874010192048e-5, 1.6286835800086949e-4, 4.0660607510675078e-4, 1.1926023391063795e-3, 6.2583884661161134e-3], [-2.9138317835692274e-8, -2.9021407108043580e-7, -9.9877365672342710e-7, -2.7932077506039462e-6, -8.0654878647092071e-6, -2.9861130639806417e-5, -2.4401052672039690e-4], [4.2332880749450802e-11, 5.9969247203844659e-10, 3.3666698344937915e-9, 1.5548463926885177e-8, 7.3655478378018481e-8, 4.6038966135214550e-7, 7.4330105808858439e-6], [1.0100416244106730e-11, 9.8794623884667105e-11, 3.2543164965238484e-10, 8.2888229337012450e-10, 1.9044568765455627e-9, 2.4945090810934376e-9, -1.3449047243228489e-7], [1.0983127270084544e-13, 8.8735512892015403e-13, 1.5841812994503665e-12, -2.0993837007004796e-12, -3.3204742077928421e-11, -2.5026545867435768e-10, -1.2002277137411971e-9], [-2.7614777932609251e-14, -2.6701457406621337e-13, -8.5911978116968757e-13, -2.1101425010145872e-12, -4.6209582485487554e-12, -6.2604267908442052e-12, 1.8239155176331522e-10], [7.4692764517304953e-16, 7.5949678732027454e-15, 2.7180176776699180e-14, 7.9937889976575386e-14, 2.3950695308704114e-13, 7.9034093495931833e-13, -5.5501600667604669e-12], [2.6027065868680251e-17, 2.3982747957501195e-16, 6.8329399710347411e-16, 1.2430472987653856e-15, 5.1629831408061843e-16, -1.5586670261123288e-14, -8.5511652387435737e-15], [-2.1769096118157973e-18, -2.1426690500932179e-17, -7.1664491954212596e-17, -1.8857254922035743e-16, -4.6966928538025244e-16, -1.0037772584219721e-15, 7.1003140072760132e-15], [2.0755970463249821e-20, 2.3668734908063861e-19, 1.0296150162194401e-18, 3.8413212663221331e-18, 1.4965902702791221e-17, 6.7495611639632360e-17, -2.4374870825143702e-16], [3.3095589415104524e-21, 3.1613167420008503e-20, 9.8511759291459226e-20, 2.2337373907606682e-19, 3.7244787366836336e-19, -5.6013691334742983e-19, -6.4331177337850051e-19], [-1.4112660861886918e-22, -1.4245889329327665e-21, -5.0202957078607292e-21, -1.4365715980812880e-20, -4.0633696347973326e-20, -1.0840208735354501e-19, 3.4989729484100092e-19]],
        [[2.5295485598531568e-3, 2.3425729553189209e-2, 6.9111277401211465e-2, 1.4961105711561814e-1, 2.8860200058858838e-1, 5.5165679385604126e-1, 1.2201583386668881e+0], [-9.3639095594503142e-5, -8.8518799986336498e-4, -2.7276569363493685e-3, -6.3476188384873481e-3, -1.3718270315287816e-2, -3.1544389003004254e-2, -9.9559464743305003e-2], [1.6909209798315052e-6, 1.6315979148569780e-5, 5.2508465455363690e-5, 1.3133861626202531e-4, 3.1792356069420255e-4, 8.7899834797863298e-4, 3.9538961320127846e-3], [-2.6910212428884946e-8, -2.6565212905356727e-7, -8.9706125340931265e-7, -2.4293386897383677e-6, -6.6547798357644830e-6, -2.2438631527014637e-5, -1.4677904133193538e-4], [2.2376617487820036e-10, 2.3398600098289983e-9, 8.8495076738278577e-9, 2.8348877021478718e-8, 9.7481238998499922e-8, 4.4799335398344101e-7, 4.7693985562633915e-6], [6.5040887393010516e-12, 6.0745555810364904e-11, 1.7922513030228656e-10, 3.5807614314637413e-10, 3.4242595735405354e-10, -3.4262085669136097e-9, -1.2090588762659511e-7], [-2.8815939133503349e-13, -2.8637479886144579e-12, -9.7730705491494280e-12, -2.6601831675157511e-11, -7.0439751356804845e-11, -1.8213094138390958e-10, 1.6492860696892739e-9], [-1.9891434706875881e-15, -1.4555402592264901e-14, -1.2646975058855708e-14, 1.3116969390875864e-13, 1.0690137457823512e-12, 7.1184742621452268e-12, 3.5100698718785285e-11], [5.7691044817909917e-16, 5.5373047570694622e-15, 1.7510448322707552e-14, 4.1512249367988741e-14, 8.3533051886869484e-14, 6.3604769871859542e-14, -3.0804627196851538e-12], [-2.0589360921439715e-17, -2.0553635106232573e-16, -7.0826361730075328e-16, -1.9605519187577200e-15, -5.3424191982095084e-15, -1.4710333457961629e-14, 9.3769017688637445e-14], [-9.0338297316809651e-20, -5.3502029970271083e-19, 7.7041926279090894e-19, 1.3841781489156655e-17, 8.8187522661448904e-17, 5.2328104738575972e-16, -6.3613070579870802e-16], [3.6329408171821943e-20, 3.4852422514753960e-19, 1.0992771507323738e-18, 2.5786604723071751e-18, 4.9554729776687573e-18, 1.5092604806584488e-18, -7.6450050414245845e-17], [-1.2961776195704613e-21, -1.3010278824770654e-20, -4.5294217355277741e-20, -1.2699307604557316e-19, -3.4860454851282335e-19, -9.1905387399061745e-19, 3.8789700339819793e-18], [-6.0723618218403692e-24, -3.4173145265220196e-23, 7.2210931684469273e-23, 1.0606679388745347e-21, 6.6224965244952086e-21, 3.7933676747181748e-20, -7.2033021952457294e-20]],
        [[2.3548231069329230e-3, 2.1776281723145666e-2, 6.4043771266866478e-2, 1.3787988205548932e-1, 2.6347469027578073e-1, 4.9482914928025342e-1, 1.0478969557410983e+0], [-8.1335080076946801e-5, -7.6670647602579527e-4, -2.3480484353035091e-3, -5.4054738957525132e-3, -1.1467807071068372e-2, -2.5474017484546435e-2, -7.3845241518682835e-2], [1.3925753930292826e-6, 1.3381079106188971e-5, 4.2672076453391412e-5, 1.0504023507559028e-4, 2.4738937154136622e-4, 6.4989574072470673e-4, 2.5780911029433224e-3], [-2.2654998199481122e-8, -2.2209216837847873e-7, -7.3880395520928925e-7, -1.9499701167349615e-6, -5.1185185278531192e-6, -1.5989420382930984e-5, -8.7491896920183837e-5], [2.8815451147506485e-10, 2.9102131868200962e-9, 1.0293428775249375e-8, 2.9948853308898196e-8, 9.0764753596597549e-8, 3.5151957499956274e-7, 2.7813755959670046e-6], [3.5402786852949194e-13, 7.1151391171414453e-13, -1.7925933645840979e-11, -1.4387100079431187e-10, -8.3429305118115323e-10, -5.5277376562173103e-9, -7.7835438925062931e-8], [-1.8886026345703364e-13, -1.8099097036432295e-12, -5.6991635513713657e-12, -1.3362369678488898e-11, -2.5871425513042210e-11, -7.0719107293998631e-12, 1.7000147565004164e-9], [6.0048149271217948e-15, 5.9847141997770600e-14, 2.0554137036290229e-13, 5.6613322493526702e-13, 1.5360707473405017e-12, 4.3307949966721471e-12, -1.8260531795292992e-11], [1.6892055540418069e-18, -7.5340272905766913e-17, -9.1109164687566417e-16, -5.4002946707608336e-15, -2.6983823987371332e-14, -1.4612973167828730e-13, -5.7997343636885262e-13], [-8.5074876720311815e-18, -8.0624358804590223e-17, -2.4739434079175787e-16, -5.5048067174853171e-16, -9.3451426677777914e-16, 5.0802539312355625e-16, 4.1576258438047204e-14], [3.8384529569497899e-19, 3.7686856240979377e-18, 1.2535239341609998e-17, 3.2667801198028038e-17, 8.0274906132464300e-17, 1.7465062622978616e-16, -1.2994820453294140e-15], [-5.5693030295511351e-21, -5.8929366707505894e-20, -2.2643969584101246e-19, -7.2819205471293973e-19, -2.3968384650259754e-18, -8.7218941398689886e-18, 1.8072796377170130e-17], [-2.7272459876850063e-22, -2.4849511791909749e-21, -6.8739267663760001e-21, -1.1510425890632513e-20, 4.7557002156365108e-22, 1.6930972633936352e-19, 4.4447680303816720e-19], [1.9483589716451825e-23, 1.8879861273748395e-22, 6.0916710979821266e-22, 1.4940390196312899e-21, 3.1985554795382857e-21, 3.7658496238163122e-21, -3.6786868818948453e-20]],
        [[2.2024875002322135e-3, 2.0342029376871478e-2, 5.9662910042173910e-2, 1.2784070712377957e-1, 2.4234017975654804e-1, 4.4853470037902726e-1, 9.1797102664321299e-1], [-7.1204326175003649e-5, -6.6953822382380550e-4, -2.0394009313580449e-3, -4.6509116304154160e-3, -9.7111156366503653e-3, -2.0955024563594979e-2, -5.6768461567032708e-2], [1.1479646010700692e-6, 1.0989666517249647e-5, 3.4763728209457481e-5, 8.4377809371087161e-5, 1.9405587791560619e-4, 4.8818134641427275e-4, 1.7504762226846148e-3], [-1.8179575584602526e-8, -1.7723548025808206e-7, -5.8258711201491792e-7, -1.5063528009363842e-6, -3.8208572418361569e-6, -1.1226483327677733e-5, -5.3423787051464126e-5], [2.6269822758989734e-10, 2.6163269094364782e-9, 8.9922113772611151e-9, 2.4997495439838840e-8, 7.0782331960983767e-8, 2.4655453357790497e-7, 1.5851148859318952e-6], [-2.3462938797823104e-12, -2.4679127277138032e-11, -9.4243696949654343e-11, -3.0477213519711668e-10, -1.0504346342350310e-9, -4.7213833460944411e-9, -4.4201279151433777e-8], [-4.8278416367957181e-14, -4.3159908719393381e-13, -1.1268723395440335e-12, -1.4847798945460532e-12, 3.2912203395538890e-12, 5.7489794414581351e-11, 1.0922921340050615e-9], [3.5287159985455407e-15, 3.4039783254406387e-14, 1.0890606127955372e-13, 2.6440417228505679e-13, 5.6452291523429869e-13, 6.9754357760798709e-13, -2.1185634954084780e-11], [-1.0211149727146677e-16, -1.0147479566654245e-15, -3.4650598368698907e-15, -9.4633931645600851e-15, -2.5412086522722592e-14, -7.1471169260442896e-14, 1.9313990262832471e-13], [6.9551771691291685e-19, 8.0874603114630974e-18, 3.5931330632622484e-17, 1.3492410582519645e-16, 5.1831673047610958e-16, 2.3247228543723350e-15, 7.0611682996849777e-15], [8.7149969592833777e-20, 8.0904810222677854e-19, 2.3588222491519838e-18, 4.6516518271194528e-18, 4.8923556133054266e-18, -2.7934839690725407e-17, -4.6153955428084969e-16], [-4.9050417067934066e-21, -4.7451930889323414e-20, -1.5278854982340719e-19, -3.7551552735927101e-19, -8.2551168247816165e-19, -1.2747768843689949e-18, 1.4697457647849748e-17], [1.2692753522565060e-22, 1.2699883530571165e-21, 4.3918779273905275e-21, 1.2186258927852287e-20, 3.3098437487215860e-20, 9.0479438895346976e-20, -2.7223500739005750e-19], [-2.4172490593468386e-25, -4.3728119596670712e-24, -2.8762121645580242e-23, -1.3851677293848104e-22, -6.1240122402381046e-22, -2.8300237416117589e-21, 2.4350576453468597e-24]],
        [[2.0329849675683494e-3, 1.8750582654500090e-2, 5.4831118431673361e-2, 1.1688320702440771e-1, 2.1967293151711944e-1, 4.0042176923716068e-1, 7.9226325972482223e-1], [-9.7056315282689586e-5, -9.1010150393820908e-4, -2.7555979668307880e-3, -6.2195909870580736e-3, -1.2764719478820800e-2, -2.6713855696587702e-2, -6.7625132872145591e-2], [2.3156034547391392e-6, 2.2075748556775588e-5, 6.9207742680144950e-5, 1.6539440316002573e-4, 3.7067556053726321e-4, 8.9063769801974050e-4, 2.8846107779837505e-3], [-5.5028201557782331e-8, -5.3339287132491964e-7, -1.7316167208746935e-6, -4.3824776803642500e-6, -1.0728361257213587e-5, -2.9606413290632715e-5, -1.2275139422853006e-4], [1.2780164370728769e-9, 1.2604144332423468e-8, 4.2431838387147742e-8, 1.1396580685974996e-7, 3.0559657613116514e-7, 9.7203822462856430e-7, 5.1818064738667875e-6], [-2.6589214501950022e-11, -2.6825081716562005e-10, -9.4628286451796745e-10, -2.7372779023001956e-9, -8.1860937948928461e-9, -3.0617082431692819e-8, -2.1415992334652213e-7], [2.9473882413565262e-13, 3.2352838819274699e-12, 1.3278957716004191e-11, 4.6749595219995576e-11, 1.7553173745344438e-10, 8.5376250520385377e-10, 8.4478672932887752e-9], [1.6252940907092843e-14, 1.4666753405287439e-13, 3.9417178580606236e-13, 5.8944643116470965e-13, -6.1748662317708243e-13, -1.5928251456846436e-11, -3.0398985236694741e-10], [-1.6108627948736861e-15, -1.5454825514237689e-14, -4.8849318243352547e-14, -1.1593591558123338e-13, -2.3602667222513047e-13, -2.2408778777589387e-13, 9.1237932854525616e-12], [8.2129330186330476e-17, 8.0550280922295356e-16, 2.6758879547312089e-15, 6.9850238340221177e-15, 1.7449131544493793e-14, 4.2616033884764440e-14, -1.7144973349266358e-13], [-2.3812232951747184e-18, -2.4179116755727040e-17, -8.6209609862860366e-17, -2.5162695154199220e-16, -7.4546033800784924e-16, -2.5148351991716772e-15, -2.7381309201367923e-15], [-1.9014850130655286e-20, -1.2079366156591959e-19, 6.6833585858947734e-20, 2.2791357210747458e-18, 1.4830725427501457e-17, 8.8473945423478848e-17, 4.7184643013893119e-16], [7.1703951376952735e-21, 6.7293346496406339e-20, 2.0185428629863628e-19, 4.2875171392197320e-19, 6.4273407013822762e-19, -8.4392503780793275e-19, -2.7583205495566242e-17], [-4.8300069010487847e-22, -4.6713261327095475e-21, -1.5034283882788042e-20, -3.6951314388964499e-20, -8.1628307957942054e-20, -1.3541194741873162e-19, 1.0686114387949284e-18]],
        [[1.8555266774054796e-3, 1.7088887558814810e-2, 4.9815058199531840e-2, 1.0562003795665888e-1, 1.9675258509235373e-1, 3.5315415720347771e-1, 6.7624324656724617e-1], [-8.0862694655563889e-5, -7.5604653132264964e-4, -2.2748290119389424e-3, -5.0795549376182794e-3, -1.0242180963174119e-2, -2.0785538508459825e-2, -4.9297032443311482e-2], [1.7618848484811134e-6, 1.6723668308679109e-5, 5.1937988363506556e-5, 1.2213867128608985e-4, 2.6657076962594059e-4, 6.1165445507980742e-4, 1.7967437662861508e-3], [-3.8371226468634386e-8, -3.6975679909699346e-7, -1.1853012429725081e-6, -2.9355996110272771e-6, -6.9352381660254698e-6, -1.7992749144924154e-5, -6.5467255121191677e-5], [8.3301084593780788e-10, 8.1499740056954281e-9, 2.6971507851517555e-8, 7.0370415382086056e-8, 1.8001854253555122e-7, 5.2831969998289497e-7, 2.3824526725412059e-6], [-1.7774122307750833e-11, -1.7668762103030966e-10, -6.0452345746682612e-10, -1.6650001516522387e-9, -4.6242406999347195e-9, -1.5398576246707999e-8, -8.6344945232957597e-8], [3.5007919607261368e-13, 3.5526714182340084e-12, 1.2680201691655892e-11, 3.7324628781837363e-11, 1.1417198861800078e-10, 4.3783241521825444e-10, 3.0944678849786985e-9], [-4.6019178311816486e-15, -4.9591457026814617e-14, -1.9761875794622204e-13, -6.7375114989323063e-13, -2.4546527447438965e-12, -1.1575729960195409e-11, -1.0807002877440408e-10], [-1.0382658520444149e-16, -8.6390821843147188e-16, -1.7386148409638594e-15, 8.3149872782120819e-16, 2.7798903550270533e-14, 2.4668111261778784e-13, 3.5795876676859248e-12], [1.3603056772169222e-17, 1.2846672656104716e-16, 3.9104142249832124e-16, 8.5557706063944052e-16, 1.3780405338836748e-15, -1.5772900966451364e-15, -1.0698650280770475e-13], [-7.9955672872065581e-19, -7.7215579423510051e-18, -2.4800073502858895e-17, -6.0954501463151793e-17, -1.3607122727312578e-16, -2.3997178722370656e-16, 2.5798284448720621e-15], [3.3496396108460727e-20, 3.2859270947681971e-19, 1.0925764234082205e-18, 2.8611815610611766e-18, 7.2291708564999394e-18, 1.8677887844108294e-17, -3.0611675049990973e-17], [-9.3053314237792252e-22, -9.3791079040392724e-21, -3.2958715990216746e-20, -9.4175956473285974e-20, -2.7143743136187188e-19, -8.8846697047464701e-19, -1.4403454001575711e-18], [3.6449502033337506e-24, 5.5031082546617231e-23, 3.1915051324531531e-22, 1.4379421907348845e-21, 6.1697667545821881e-21, 2.9616271703471972e-20, 1.3421031340650230e-19]],
        [[1.7065821164841115e-3, 1.5697938312152177e-2, 4.5640497370311828e-2, 9.6338507848958585e-2, 1.7816772390393961e-1, 3.1588063875015059e-1, 5.8992016913776861e-1], [-6.8407136694005348e-5, -6.3802961833056304e-4, -1.9097041473227760e-3, -4.2264589347169369e-3, -8.3997102622679415e-3, -1.6632433976043593e-2, -3.7526812035252206e-2], [1.3710202026123546e-6, 1.2966037692431599e-5, 3.9953058365947388e-5, 9.2708937386622924e-5, 1.9800118268731380e-4, 4.3788170622173751e-4, 1.1935985119404330e-3], [-2.7476870653877129e-8, -2.6348441698158291e-7, -8.3582562235990686e-7, -2.0335227903682248e-6, -4.6671834220148264e-6, -1.1527707909904272e-5, -3.7963158092457908e-5], [5.5047686971435689e-10, 5.3524781887050707e-9, 1.7480004120921791e-8, 4.4591143881013447e-8, 1.0998418409701103e-7, 3.0341581257260842e-7, 1.2072638981917097e-6], [-1.1004152653796648e-11, -1.0850198180565517e-10, -3.6485737214676200e-10, -9.7613605019722489e-10, -2.5882365869478849e-9, -7.9779773248904257e-9, -3.8369116537687761e-8], [2.1748724078406540e-13, 2.1758881991310234e-12, 7.5424926666164437e-12, 2.1197083683743509e-11, 6.0536766874852443e-11, 2.0892760484488490e-10, 1.2170130928313866e-9], [-4.0846413344588496e-15, -4.1606482691814183e-14, -1.4962686703307185e-13, -4.4551736459255731e-13, -1.3837050039516824e-12, -5.3977460697119652e-12, -3.8386728640638076e-11], [6.0973156952551450e-17, 6.4623157314713508e-16, 2.5047323447219146e-15, 8.2742823040375579e-15, 2.9248907297603004e-14, 1.3397968697782809e-13, 1.1945380958205187e-12], [1.4078947757060160e-19, -1.0608528040672446e-19, -1.1333089898343404e-17, -8.2421521784500161e-17, -4.6405088216693302e-16, -2.9721501590206129e-15, -3.6112294219296119e-14], [-7.9020235255637187e-20, -7.2803253510831274e-19, -2.0774272173122682e-18, -3.8275802603291740e-18, -2.0771040437065913e-18, 4.5358520911615659e-17, 1.0311113385020287e-15], [5.2037824227447985e-21, 4.9603392346975616e-20, 1.5460494430760363e-19, 3.5795170135571317e-19, 6.9462069869537394e-19, 4.9373314804289008e-19, -2.6341895366221580e-17], [-2.4652620034673066e-22, -2.3827705930680822e-21, -7.6728194655915731e-21, -1.8998425809654490e-20, -4.3430123483396967e-20, -8.7267355752284825e-20, 5.2603426227650749e-19], [9.2140135291136655e-24, 9.0135842000716968e-23, 2.9802544662981523e-22, 7.7400635956711043e-22, 1.9371600599909765e-21, 5.0147153313143071e-21, -3.5922589864003971e-21]],
        [[1.5797876012834674e-3, 1.4516524436736231e-2, 4.2111979055202047e-2, 8.8557672512688742e-2, 1.6279377077514187e-1, 2.8573201146847166e-1, 5.2317163073426241e-1], [-5.8623196120379784e-5, -5.4564098376897768e-4, -1.6259418709757126e-3, -3.5715908953493176e-3, -7.0132895111470340e-3, -1.3610761431512478e-2, -2.9521434949665130e-2], [1.0877025865409428e-6, 1.0254658320999286e-5, 3.1388766973958055e-5, 7.2022318474965557e-5, 1.5106909519808872e-4, 3.2417223931910804e-4, 8.3291486974693362e-4], [-2.0181307829308844e-8, -1.9272315667880636e-7, -6.0595730947805456e-7, -1.4523492949314612e-6, -3.2540795271198463e-6, -7.7209014763196764e-6, -2.3499722281294635e-5], [3.7443349254116035e-10, 3.6218726435128768e-9, 1.1697607312993893e-8, 2.9286219236125698e-8, 7.0092302394604944e-8, 1.8388724927392457e-7, 6.6300771996987696e-7], [-6.9454647526384061e-12, -6.8051431250821629e-11, -2.2576879485898387e-10, -5.9044269359874230e-10, -1.5095519295658463e-9, -4.3791195100815697e-9, -1.8704426493320644e-8], [1.2866030377194980e-13, 1.2769856970723720e-12, 4.3524098150456650e-12, 1.1892364230524567e-11, 3.2485994434200737e-11, 1.0423100822251114e-10, 5.2753500592457824e-10], [-2.3673991927683140e-15, -2.3811868907833705e-14, -8.3442375775040100e-14, -2.3845414246262411e-13, -6.9681796671676607e-13, -2.4758456900468313e-12, -1.4864841004146862e-11], [4.2299537503388606e-17, 4.3208748522728007e-16, 1.5629513979229176e-15, 4.6959146325534936e-15, 1.4764249017582400e-14, 5.8406087396734764e-14, 4.1775607516342047e-13], [-6.6873042276082225e-19, -7.0171720794692475e-18, -2.6736967007374888e-17, -8.6579496234247951e-17, -3.0019370339525202e-16, -1.3497023686924046e-15, -1.1662578578441386e-14], [5.1457872213704189e-21, 6.2756369825660169e-20, 3.0019777176572633e-19, 1.2329094737709831e-18, 5.3284765212033297e-18, 2.9464980240357193e-17, 3.2075794980010414e-16], [3.0366865875765510e-22, 2.6269447324644930e-21, 6.1446139041088326e-21, 3.6942811383400346e-21, -5.0736007904695489e-20, -5.4800465703139612e-19, -8.5562504899620137e-18], [-2.4887696418785527e-23, -2.3340548250971522e-22, -6.9879867281743714e-22, -1.4739006480791302e-21, -2.0888750927630330e-21, 5.2328607154549134e-21, 2.1511857783393325e-19], [1.2683068443214665e-24, 1.2119489358546752e-23, 3.8028217606902756e-23, 8.9565391746512329e-23, 1.8350592631832123e-22, 2.2615363420428487e-22, -4.8147826854213473e-21]],
        [[1.4705414963303035e-3, 1.3500589657903060e-2, 3.9090219835790154e-2, 8.1940568583071929e-2, 1.4986418999580422e-1, 2.6084188371699165e-1, 4.7001008952491429e-1], [-5.0798001044584608e-5, -4.7196291998338144e-4, -1.4010457995951555e-3, -3.0579661304293115e-3, -5.9439161944082699e-3, -1.1343846036057840e-2, -2.3830333154200175e-2], [8.7737641851683457e-7, 8.2496024019833552e-6, 2.5107677887833805e-5, 5.7060604069504733e-5, 1.1787385323150375e-4, 2.4666828552336325e-4, 6.0411976280423884e-4], [-1.5153926826239059e-8, -1.4419760617710878e-7, -4.4994627553835579e-7, -1.0647311494713446e-6, -2.3375568939117404e-6, -5.3637215131769790e-6, -1.5314961088291539e-5], [2.6173592668700885e-10, 2.5204729051568016e-9, 8.0633177179244478e-9, 1.9867472816616705e-8, 4.6356012745987571e-8, 1.1663219077681133e-7, 3.8824711094674281e-7], [-4.5205664150740042e-12, -4.4055249945158306e-11, -1.4449709525275600e-10, -3.7071348238318641e-10, -9.1927225480698765e-10, -2.5360989035522887e-9, -9.8423246191475903e-9], [7.8066547715529394e-14, 7.6994285520651340e-13, 2.5891348369814514e-12, 6.9165816845081708e-12, 1.8228397450861697e-11, 5.5142977913789612e-11, 2.4950192047798187e-10], [-1.3471435349344424e-15, -1.3446652582679053e-14, -4.6363865680299484e-14, -1.2897985330901587e-13, -3.6131544524463164e-13, -1.1986908980923032e-12, -6.3240960795322896e-12], [2.3162691385595001e-17, 2.3404613312832059e-16, 8.2781596086975407e-16, 2.3996413077944859e-15, 7.1501725839902276e-15, 2.6031967967880684e-14, 1.6023189818448278e-13], [-3.9209527693863730e-19, -4.0155785343283798e-18, -1.4602423613657657e-17, -4.4235717861253134e-17, -1.4063672410244521e-16, -5.6348299776949717e-16, -4.0549484858694748e-15], [6.2375607758941830e-21, 6.5124867984812797e-20, 2.4602317619798298e-19, 7.8886357947965280e-19, 2.7101453738433531e-18, 1.2075729853853346e-17, 1.0229981290587995e-16], [-7.5792880697980394e-23, -8.3537723989620714e-22, -3.4695145481510761e-21, -1.2517102772923008e-20, -4.8960635693731403e-20, -2.5170479721258421e-19, -2.5621208727991700e-18], [-3.9694942370762003e-25, -1.6033935488824094e-24, 1.1772014699723473e-23, 1.1474341051713926e-22, 7.1066383083169079e-22, 4.8729237883299331e-21, 6.3177007379643666e-20], [8.8222513778250794e-26, 8.0223865849248307e-25, 2.2060091909367801e-24, 3.5925369108874708e-24, -1.4042648770609344e-24, -7.6163323697095470e-23, -1.5096682185801204e-21]],
        [[1.3754347611365271e-3, 1.2617624670125623e-2, 3.6473307670427171e-2, 7.6244138003831391e-2, 1.3883858838442260e-1, 2.3994383208151347e-1, 4.2666626546436373e-1], [-4.4441453976683555e-5, -4.1226303740239608e-4, -1.2197882680778533e-3, -2.6476948492036934e-3, -5.1017775026065869e-3, -9.5996726487714471e-3, -1.9639998346239829e-2], [7.1797037754721516e-7, 6.7350557760791316e-6, 2.0396880793233832e-5, 4.5972635999714985e-5, 9.3735228662033287e-5, 1.9203184775911089e-4, 4.5202722344289251e-4], [-1.1599113192261802e-8, -1.1002920829893200e-7, -3.4106963543153984e-7, -7.9823520109011990e-7, -1.7222023045980871e-6, -3.8414049560436278e-6, -1.0403697845147196e-5], [1.8738851638994964e-10, 1.7975240379401868e-9, 5.7032483932166621e-9, 1.3859969688601180e-8, 3.1642109634357670e-8, 7.6843453484969100e-8, 2.3944778946758861e-7], [-3.0273351248670114e-12, -2.9365729058498188e-11, -9.5367614639605503e-11, -2.4065403638742489e-10, -5.8136146474983575e-10, -1.5371749589536905e-9, -5.5110416785212890e-9], [4.8907241955456448e-14, 4.7973589942225347e-13, 1.5946864508678236e-12, 4.1784994204460068e-12, 1.0681299618322934e-11, 3.0749467345480818e-11, 1.2683973117987668e-10], [-7.9005156083191678e-16, -7.8367292116959739e-15, -2.6663916976956834e-14, -7.2548106869858438e-14, -1.9623913296835693e-13, -6.1509336186801482e-13, -2.9192506220747773e-12], [1.2757708890082219e-17, 1.2797136905101993e-16, 4.4569473463617307e-16, 1.2592826890798795e-15, 3.6046977023367554e-15, 1.2302590232090245e-14, 6.7184024875874056e-14], [-2.0563769128688066e-19, -2.0862243079031298e-18, -7.4392275252799546e-18, -2.1834205267281575e-17, -6.6164094774300230e-17, -2.4596089422272931e-16, -1.5459229842953364e-15], [3.2891319530075123e-21, 3.3770476020439825e-20, 1.2343989442745408e-19, 3.7691078506793198e-19, 1.2109900312871606e-18, 4.9101376060054421e-18, 3.5554110233959527e-17], [-5.1049920973992851e-23, -5.3198288446529138e-22, -2.0035090975777420e-21, -6.4043493532465688e-21, -2.1952522831147921e-20, -9.7573227980070989e-20, -8.1657487657870341e-19], [7.0579146682959613e-25, 7.5661502679402436e-24, 3.0037052058803296e-23, 1.0316387545535979e-22, 3.8618631578122625e-22, 1.9140053557054031e-21, 1.8691410866926185e-20], [-5.2807172192979331e-27, -6.5646923207514988e-26, -3.2323551643867765e-25, -1.3740654503248298e-24, -6.1980052468827013e-24, -3.6274971413601879e-23, -4.2443582474786922e-22]],
        [[1.2918880351541529e-3, 1.1843115984292715e-2, 3.4184952804933853e-2, 7.1288636821404610e-2, 1.2932501613745652e-1, 2.2214812996969013e-1, 3.9064820002970614e-1], [-3.9207700169744533e-5, -3.6321597765253410e-4, -1.0715658818148887e-3, -2.3147926586402198e-3, -4.4267563189918533e-3, -8.2290060302735559e-3, -1.6465452704590891e-2], [5.9496013225813465e-7, 5.5697270291787152e-6, 1.6794720261260179e-5, 3.7581480661658486e-5, 7.5763267200459401e-5, 1.5241303235765408e-4, 3.4700164077473023e-4], [-9.0282663133327531e-9, -8.5408850549704233e-8, -2.6322471926413136e-7, -6.1014868104375415e-7, -1.2966768981076891e-6, -2.8229086635845456e-6, -7.3128957206920727e-6], [1.3700009015336232e-10, 1.3097000333998946e-9, 4.1255377321563693e-9, 9.9059803644388598e-9, 2.2192429471676035e-8, 5.2284329901689639e-8, 1.5411582319571918e-7], [-2.0789177135678033e-12, -2.0083562703751438e-11, -6.4659808642204363e-11, -1.6082709295503625e-10, -3.7982005436836596e-10, -9.6838095750281446e-10, -3.2479180499118709e-9], [3.1546659912858323e-14, 3.0797064772162405e-13, 1.0134164432641281e-12, 2.6110830289656646e-12, 6.5005590458816275e-12, 1.7935800623323822e-11, 6.8448319980822879e-11], [-4.7870390780004066e-16, -4.7225386918810163e-15, -1.5883249037786676e-14, -4.2391653265350810e-14, -1.1125566415100571e-13, -3.3219595771707600e-13, -1.4425139191919992e-12], [7.2638295095957767e-18, 7.2414858772941509e-17, 2.4893065718917916e-16, 6.8822423260175781e-16, 1.9040841820848895e-15, 6.1526644742086610e-15, 3.0400099646251369e-14], [-1.1020104718354833e-19, -1.1102139180807692e-18, -3.9008058590494156e-18, -1.1171973647467729e-17, -3.2584827479639476e-17, -1.1394932485653650e-16, -6.4065093030146188e-16], [1.6704630103346874e-21, 1.7007699576324039e-20, 6.1086223270508484e-20, 1.8126397567419058e-19, 5.5744187358774769e-19, 2.1099949713084594e-18, 1.3500152578415544e-17], [-2.5230624740148249e-23, -2.5969370018161515e-22, -9.5401852602374981e-22, -2.9351432976890813e-21, -9.5244164908333728e-21, -3.9045989907135508e-20, -2.8442374183792138e-19], [3.7582746078787414e-25, 3.9159610566467085e-24, 1.4749648903529081e-23, 4.7188729339660878e-23, 1.6203781408594174e-22, 7.2111463463512096e-22, 5.9888252365024398e-21], [-5.3206946826052662e-27, -5.6441744043196168e-26, -2.2010656109457882e-25, -7.4063161171842086e-25, -2.7192842294979903e-24, -1.3237098498688647e-23, -1.2586035692427785e-22]],
        [[1.2179136182880796e-3, 1.1158229165330922e-2, 3.2166908564134349e-2, 6.6938271309605055e-2, 1.2103224803654182e-1, 2.0681130692372434e-1, 3.6024208149170393e-1], [-3.4847025418364924e-5, -3.2242967131026651e-4, -9.4881114747242637e-4, -2.0409576963773840e-3, -3.8773813847267808e-3, -7.1323142645342819e-3, -1.4002957005072220e-2], [4.9852270402057606e-7, 4.6584852937049533e-6, 1.3993302958700909e-5, 3.1114549546136611e-5, 6.2107771467841480e-5, 1.2298628040367147e-4, 2.7215421928696124e-4], [-7.1318823752889739e-9, -6.7306104746753962e-8, -2.0637671490982709e-7, -4.7434358641297218e-7, -9.9484030426711503e-7, -2.1207177089989777e-6, -5.2894484390902940e-6], [1.0202894627235425e-10, 9.7244306848047036e-10, 3.0436951560530765e-9, 7.2314027081323733e-9, 1.5935320284731413e-8, 3.6568661029458459e-8, 1.0280298006647698e-7], [-1.4596294867247434e-12, -1.4049921906986617e-11, -4.4889173435916789e-11, -1.1024326321032158e-10, -2.5525145123087626e-10, -6.3057282864099043e-10, -1.9980254660615521e-9], [2.0881506638467539e-14, 2.0299419197486252e-13, 6.6203666528766838e-13, 1.6806665374491862e-12, 4.0886094432756018e-12, 1.0873301625294106e-11, 3.8832587265883626e-11], [-2.9873138357641055e-16, -2.9328722059255064e-15, -9.7638774266852613e-15, -2.5621875258270032e-14, -6.5491197170337493e-14, -1.8749407329709729e-13, -7.5472996499085210e-13], [4.2736473141815534e-18, 4.2374203040287197e-17, 1.4399970352871860e-16, 3.9060648553943783e-16, 1.0490341234877780e-15, 3.2330561832333397e-15, 1.4668532210292225e-14], [-6.1137777788230524e-20, -6.1221439232363034e-19, -2.1237104498177458e-18, -5.9547500924602068e-18, -1.6803243619092228e-17, -5.5748993710273735e-17, -2.8508926651633815e-16], [8.7455143949953972e-22, 8.8444916918262570e-21, 3.1318517214496234e-20, 9.0774973823902194e-20, 2.6914232080286574e-19, 9.6128584361565562e-19, 5.5407913092713176e-18], [-1.2505403169336453e-23, -1.2772984758981221e-22, -4.6172346372351542e-22, -1.3834869910176165e-21, -4.3103255110690369e-21, -1.6574333991166780e-20, -1.0768405515863794e-19], [1.7853461092171749e-25, 1.8419908475971471e-24, 6.7991018879602623e-24, 2.1067530862249356e-23, 6.8993619928503439e-23, 2.8569806882382790e-22, 2.0926446871375146e-21], [-2.5329544490417760e-27, -2.6413852293571507e-26, -9.9662827307774611e-26, -3.1976044328316030e-25, -1.1020821282907482e-24, -4.9191752829031119e-24, -4.0641994606295425e-23]],
        [[1.1519549680010550e-3, 1.0548253708966918e-2, 3.0373933060439611e-2, 6.3088533508925181e-2, 1.1373936740811829e-1, 1.9345642379557241e-1, 3.3423032589292534e-1], [-3.1175477069353527e-5, -2.8814774184976562e-4, -8.4600597014065212e-4, -1.8129972976787702e-3, -3.4242933249998879e-3, -6.2411462303491640e-3, -1.2054394550652918e-2], [4.2185258864250071e-7, 3.9356808920194590e-6, 1.1781913459961696e-5, 2.6050369366448425e-5, 5.1546729346414493e-5, 1.0067359228597570e-4, 2.1737768348008016e-4], [-5.7083202334989640e-9, -5.3755701794977396e-8, -1.6408097540333047e-7, -3.7430929709370951e-7, -7.7594559055688667e-7, -1.6239280109250574e-6, -3.9199859500637077e-6], [7.7242431987872091e-11, 7.3422504381359270e-10, 2.2850758987477144e-9, 5.3783287260114018e-9, 1.1680499754749361e-8, 2.6194974518397190e-8, 7.0689362414799363e-8], [-1.0452099835272409e-12, -1.0028450876293836e-11, -3.1823140059049262e-11, -7.7279458727783391e-11, -1.7582943462091215e-10, -4.2254132280068596e-10, -1.2747458846729523e-9], [1.4143313173563653e-14, 1.3697411643844445e-13, 4.4318538419077070e-13, 1.1104034411384216e-12, 2.6468037034152263e-12, 6.8158558061398716e-12, 2.2987575685234764e-11], [-1.9138097137145387e-16, -1.8708680238356617e-15, -6.1720270100614123e-15, -1.5955026040203136e-14, -3.9842986147483034e-14, -1.0994401567666860e-13, -4.1453644885590459e-13], [2.5896809702468690e-18, 2.5553342487478350e-17, 8.5954800013103781e-17, 2.2925255019239053e-16, 5.9976619168954758e-16, 1.7734655886590497e-15, 7.4753624931181890e-15], [-3.5042351551623110e-20, -3.4902117653847223e-19, -1.1970492299625090e-18, -3.2940522148863871e-18, -9.0284214532642559e-18, -2.8607096139277894e-17, -1.3480367002852598e-16], [4.7417345523651140e-22, 4.7670869056768791e-21, 1.6670610621684932e-20, 4.7330916760770318e-20, 1.3590654382466892e-19, 4.6144933700374376e-19, 2.4309210549766345e-18], [-6.4160274182398319e-24, -6.5108924359585430e-23, -2.3215569178346899e-22, -6.8006509307324951e-22, -2.0457992386784113e-21, -7.4433947840323542e-21, -4.3836792988086565e-20], [8.6801364129417910e-26, 8.8913017639307601e-25, 3.2326258281980785e-24, 9.7705240516128874e-24, 3.0793663710399590e-23, 1.2006201785618081e-22, 7.9050100136167433e-22], [-1.1733940588738815e-27, -1.2133621016324581e-26, -4.4984849467435714e-26, -1.4030143353109328e-25, -4.6331888627668483e-25, -1.9359199943701435e-24, -1.4249920846512015e-23]],
        [[1.0927757719823037e-3, 1.0001532559158812e-2, 2.8770350398105573e-2, 5.9657678819089861e-2, 1.0727574819768811e-1, 1.8172245031499252e-1, 3.1172400564189435e-1], [-2.8055123096340617e-5, -2.5905702414131845e-4, -7.5904989578933855e-4, -1.6212070390708799e-3, -3.0462343566535373e-3, -5.5071702890365931e-3, -1.0486065563560612e-2], [3.6013331926413107e-7, 3.3550129122711016e-6, 1.0013029669873964e-5, 2.2028281317340845e-5, 4.3250892729995069e-5, 8.3448480195693863e-5, 1.7637007258531347e-4], [-4.6228992544004857e-9, -4.3450324031222981e-8, -1.3208718389389212e-7, -2.9931104794237456e-7, -6.1408266828044246e-7, -1.2644694973085139e-6, -2.9664512695630927e-6], [5.9342461175130337e-11, 5.6271934200614562e-10, 1.7424320834167784e-9, 4.0669129892449171e-9, 8.7188379170821516e-9, 1.9160122579491921e-8, 4.9894140234180193e-8], [-7.6175739605432976e-13, -7.2877030245921067e-12, -2.2985345555589577e-11, -5.5259508045295975e-11, -1.2379136971267828e-10, -2.9032752315353218e-10, -8.3919303014633420e-10], [9.7784001343805973e-15, 9.4382068288636770e-14, 3.0321188139537921e-13, 7.5084301950953961e-13, 1.7576084518424229e-12, 4.3992448556672717e-12, 1.4114782587542853e-11], [-1.2552173371728543e-16, -1.2223295556649390e-15, -3.9998287021402985e-15, -1.0202140032707673e-14, -2.4954788641017143e-14, -6.6660422254076961e-14, -2.3740317214932815e-13], [1.6112764066529920e-18, 1.5830226560760474e-17, 5.2763860691328301e-17, 1.3862239852635149e-16, 3.5431183264860763e-16, 1.0100851439495879e-15, 3.9929956870878403e-15], [-2.0683361805626940e-20, -2.0501512975885318e-19, -6.9603600593215612e-19, -1.8835428821285434e-18, -5.0305723315753375e-18, -1.5305513151180823e-17, -6.7160072855877375e-17], [2.6550455920215046e-22, 2.6551220080599904e-21, 9.1817753786111029e-21, 2.5592780371151937e-20, 7.1424800514307032e-20, 2.3191975517245205e-19, 1.1295967871407547e-18], [-3.4081726979948557e-24, -3.4386019500231902e-23, -1.2112133417255691e-22, -3.4774322401101054e-22, -1.0140985552756155e-21, -3.5142067159950049e-21, -1.8999213478140106e-20], [4.3748773982538666e-26, 4.4532216575501964e-25, 1.5977561164214690e-24, 4.7249449372215927e-24, 1.4398233965483334e-23, 5.3249523388827473e-23, 3.1955627650186382e-22], [-5.6164739410198327e-28, -5.7669570825167976e-27, -2.1074764209625365e-26, -6.4191429055276115e-26, -2.0439109952959589e-25, -8.0669310598353278e-25, -5.3732485221553802e-24]],
        [[1.0393816014410409e-3, 9.5087087124218388e-3, 2.7327648556962273e-2, 5.6580846381741092e-2, 1.0150751017396683e-1, 1.7133105727312687e-1, 2.9205891780120276e-1], [-2.5380895121121283e-5, -2.3415980831176251e-4, -6.8484444671065149e-4, -1.4583195999681362e-3, -2.7275060241444678e-3, -4.8954723620667986e-3, -9.2050896870755547e-3], [3.0989091795363080e-7, 2.8831893733884351e-6, 8.5812710012864966e-6, 1.8793427384443645e-5, 3.6644033032603536e-5, 6.9939595392664592e-5, 1.4506264144411577e-4], [-3.7836483138937044e-9, -3.5500460231639096e-8, -1.0752545684090587e-7, -2.4219170671646455e-7, -4.9231244404518689e-7, -9.9919816555239818e-7, -2.2860363840115291e-6], [4.6196883270298737e-11, 4.3711408216553042e-10, 1.3473206786164158e-9, 3.1211349373549355e-9, 6.6142158082349573e-9, 1.4275132254310078e-8, 3.6025556249349907e-8], [-5.6404608643220235e-13, -5.3821477124667714e-12, -1.6882262715811030e-11, -4.0222200129148023e-11, -8.8861964159203459e-11, -2.0394292934401241e-10, -5.6772530487770816e-10], [6.8867846723482459e-15, 6.6269917123256472e-14, 2.1153894460793885e-13, 5.1834522239098903e-13, 1.1938601495801393e-12, 2.9136485524765048e-12, 8.9467604487871467e-12], [-8.4084978620602576e-17, -8.1597573120142498e-16, -2.6506355122707984e-15, -6.6799371663617514e-15, -1.6039506555530213e-14, -4.1626095664469332e-14, -1.4099164127092710e-13], [1.0266450833656563e-18, 1.0047038268854510e-17, 3.3213121239619016e-17, 8.6084637406611962e-17, 2.1549070929282483e-16, 5.9469486745491159e-16, 2.2218816540973173e-15], [-1.2534939516422051e-20, -1.2370830844326312e-19, -4.1616865546269797e-19, -1.1093764183655579e-18, -2.8951168475525562e-18, -8.4961603784930378e-18, -3.5014544376120288e-17], [1.5304675929514992e-22, 1.5232095913795750e-21, 5.2146964267901773e-21, 1.4296581194732512e-20, 3.8895883002423055e-20, 1.2138113906624707e-19, 5.5179280567762268e-19], [-1.8686412771631741e-24, -1.8755142601995565e-23, -6.5341427102074855e-23, -1.8424062499169229e-22, -5.2256597724563913e-22, -1.7341221720637663e-21, -8.6956805684589981e-21], [2.2815475160144947e-26, 2.3093088783196517e-25, 8.1874533698030127e-25, 2.3743187364772928e-24, 7.0206746456548076e-24, 2.4774690727692835e-23, 1.3703487761207029e-22], [-2.7862219404484750e-28, -2.8436639565977910e-27, -1.0259523459450930e-26, -3.0597674712024295e-26, -9.4315223752092645e-26, -3.5388897488614257e-25, -2.1590177469756978e-24]],
        [[9.9096349901019244e-4, 9.0621844578722861e-3, 2.6022766691015002e-2, 5.3805912857339218e-2, 9.6328129346630413e-2, 1.6206421069090770e-1, 2.7472876222084888e-1], [-2.3071620069817811e-5, -2.1268707589413525e-4, -6.2101301536513486e-4, -1.3188054749421108e-3, -2.4563113514395310e-3, -4.3803214056491993e-3, -8.1453126205465659e-3], [2.6857682103210599e-7, 2.4958547501812039e-6, 7.4099954442210562e-6, 1.6162237460302192e-5, 3.1317256424131669e-5, 5.9196338090285835e-5, 1.2074840135067632e-4], [-3.1265038422714236e-9, -2.9288525914488104e-8, -8.8416878752682361e-8, -1.9807160698560309e-7, -3.9928592495411123e-7, -7.9998842979424546e-7, -1.7900082056967938e-6], [3.6395643667885340e-11, 3.4369698404178337e-10, 1.0549998994214354e-9, 2.4274090508954538e-9, 5.0907795915229246e-9, 1.0811166846647939e-8, 2.6535584244767331e-8], [-4.2368183275196647e-13, -4.0332387223687024e-12, -1.2588374566948000e-11, -2.9748406599221573e-11, -6.4905961442151673e-11, -1.4610377379597555e-10, -3.9337095158009619e-10], [4.9320819008447231e-15, 4.7329523815747153e-14, 1.5020586667791304e-13, 3.6457295685940196e-13, 8.2753215985692734e-13, 1.9744689005551594e-12, 5.8314414380196974e-12], [-5.7414385031597430e-17, -5.5540571208704588e-16, -1.7922728835538306e-15, -4.4679179850980971e-15, -1.0550794724850480e-14, -2.6683276810452724e-14, -8.6446925245508916e-14], [6.6836108456434028e-19, 6.5176126894205818e-18, 2.1385596714981382e-17, 5.4755271188701441e-17, 1.3451956881320900e-16, 3.6060191230654886e-16, 1.2815134926330627e-15], [-7.7803940417634455e-21, -7.6483324228251155e-20, -2.5517528659990948e-19, -6.7103732258196461e-19, -1.7150854378573548e-18, -4.8732297786001577e-18, -1.8997515840269895e-17], [9.0571597757686237e-23, 8.9752170769871605e-22, 3.0447795136739732e-21, 8.2237029937633969e-21, 2.1866841246663643e-20, 6.5857577697872804e-20, 2.8162450887200025e-19], [-1.0543443312295397e-24, -1.0532298086450358e-23, -3.6330641609419364e-23, -1.0078320035944427e-22, -2.7879586947861254e-22, -8.9000943732085569e-22, -4.1748807749808060e-21], [1.2273722625049321e-26, 1.2359596561685986e-25, 4.3350298680853644e-25, 1.2351230128314042e-24, 3.5545726417404645e-24, 1.2027733597523349e-23, 6.1889618919679871e-23], [-1.4295616706174087e-28, -1.4509758105362012e-27, -5.1743992831793769e-27, -1.5139649451379111e-26, -4.5321045081078654e-26, -1.6253013924683538e-25, -9.1729016525695329e-25]],
        [[9.4685665448918500e-4, 8.6557263661257290e-3, 2.4836851481885839e-2, 5.1290511165392610e-2, 9.1651788355365208e-2, 1.5374867819172921e-1, 2.5934083336517650e-1], [-2.1063782830549518e-5, -1.9403835573888009e-4, -5.6570804321757655e-4, -1.1983970836826841e-3, -2.2236464441034738e-3, -3.9424160307954796e-3, -7.2585804177616052e-3], [2.3429256425932445e-7, 2.1749118390107204e-6, 6.4425555387820077e-6, 1.4000207226908896e-5, 2.6974942863101106e-5, 5.0545618806852572e-5, 1.0157866194353582e-4], [-2.6060373917070816e-9, -2.4377868434602387e-8, -7.3370924044519785e-8, -1.6355664167177764e-7, -3.2723167138242656e-7, -6.4804413349854974e-7, -1.4215210093960849e-6], [2.8986967249453204e-11, 2.7324347532408374e-10, 8.3558340517844026e-10, 1.9107413627088552e-9, 3.9696309015064266e-9, 8.3085578705973054e-9, 1.9893173836821317e-8], [-3.2242218511318824e-13, -3.0626958631545660e-12, -9.5160260839286240e-12, -2.2322129617292513e-11, -4.8155392256572865e-11, -1.0652381577221519e-10, -2.7839079597572471e-10], [3.5863036156402809e-15, 3.4328746328008298e-14, 1.0837308623987065e-13, 2.6077703679622559e-13, 5.8417063473189573e-13, 1.3657392177322483e-12, 3.8958808644473480e-12], [-3.9890473476681231e-17, -3.8477957887683891e-16, -1.2342048789659280e-15, -3.0465132174272618e-15, -7.0865445070988774e-15, -1.7510108864671070e-14, -5.4520077277587972e-14], [4.4370194069734677e-19, 4.3128672077220043e-18, 1.4055719331350903e-17, 3.5590721092492685e-17, 8.5966514003334808e-17, 2.2449667438077910e-16, 7.6296964146872099e-16], [-4.9352989578068772e-21, -4.8341503999493161e-20, -1.6007329843384694e-19, -4.1578661816544005e-19, -1.0428554456153463e-18, -2.8782663315943531e-18, -1.0677216593754284e-17], [5.4895355533466664e-23, 5.4184395119650556e-22, 1.8229917846884372e-21, 4.8574040238847905e-21, 1.2650826812754349e-20, 3.6902181728381719e-20, 1.4942003979051434e-19], [-6.1060127307409695e-25, -6.0733496508983042e-24, -2.0761106971863871e-23, -5.6746350341708816e-23, -1.5346653861141920e-22, -4.7312195627814361e-22, -2.0910270016336141e-21], [6.7917846853743684e-27, 6.8074681382037819e-26, 2.3643934857830283e-25, 6.6293957487078671e-25, 1.8617006359217073e-24, 6.0658956689878662e-24, 2.9262451223124342e-23], [-7.5652068959486134e-29, -7.6370187706521311e-28, -2.6946502446218237e-27, -7.7480086826563516e-27, -2.2588553069739789e-26, -7.7772275271136628e-26, -4.0945126580123422e-25]],
        [[9.0650966040479524e-4, 8.2841721570152764e-3, 2.3754339186398520e-2, 4.8999849308007580e-2, 8.7408577049591431e-2, 1.4624508072578077e-1, 2.4558584389748505e-1], [-1.9307109129766408e-5, -1.7773925806493533e-4, -5.1747572564046954e-4, -1.0937582785151561e-3, -2.0225428425920251e-3, -3.5670483889208372e-3, -6.5091657253868488e-3], [2.0560424186889202e-7, 1.9067230411623749e-6, 5.6364676054735108e-6, 1.2207253580522100e-5, 2.3399760573835758e-5, 4.3501751121327537e-5, 8.6261564934168398e-5], [-2.1895097805868829e-9, -2.0454641227157968e-8, -6.1393734031159580e-8, -1.3624311962371559e-7, -2.7072296486492105e-7, -5.3052331908355264e-7, -1.1431660982098468e-6], [2.3316411352751114e-11, 2.1943005811514736e-10, 6.6871502545823966e-10, 1.5205867169352417e-9, 3.1321228041624877e-9, 6.4699692503514070e-9, 1.5149606074195940e-8], [-2.4829989031836069e-13, -2.3539669979881135e-12, -7.2838017157688092e-12, -1.6971014537143783e-11, -3.6237019143350263e-11, -7.8904169891729289e-11, -2.0076746901672386e-10], [2.6441820140917798e-15, 2.5252514059443053e-14, 7.9336885541462579e-14, 1.8941066051164990e-13, 4.1924331787069051e-13, 9.6227165623155408e-13, 2.6606352942758258e-12], [-2.8158282771216346e-17, -2.7089991782696332e-16, -8.6415606204550695e-16, -2.1139807662610847e-15, -4.8504254415605747e-15, -1.1735333400721486e-14, -3.5259597602221644e-14], [2.9986169045774682e-19, 2.9061172010787453e-18, 9.4125915641027909e-18, 2.3593786474577732e-17, 5.6116880010452108e-17, 1.4311764160798572e-16, 4.6727156696193598e-16], [-3.1932711996893152e-21, -3.1175783493179473e-20, -1.0252416646057189e-19, -2.6332631265821404e-19, -6.4924288808454743e-19, -1.7453836751007353e-18, -6.1924336106845363e-18], [3.4005614254078702e-23, 3.3444262899224670e-22, 1.1167173924757146e-21, 2.9389410221109294e-21, 7.5113999145911279e-21, 2.1285734862136052e-20, 8.2064128728136227e-20], [-3.6213071981168018e-25, -3.5877806078840585e-24, -1.2163548314221988e-23, -3.2801028301331262e-23, -8.6902956186503412e-23, -2.5958905390866706e-22, -1.0875403089623929e-21], [3.8564715555395919e-27, 3.8488963778291883e-26, 1.3249002015317979e-25, 3.6609017381278093e-25, 1.0054281291699015e-24, 3.1658154513714781e-24, 1.4412450985758850e-23], [-4.1092961931122215e-29, -4.1339304878980295e-28, -1.4449748329357700e-27, -4.0897930159108199e-27, -1.1638543885989471e-26, -3.8615868254718844e-26, -1.9098863448592847e-25]],
        [[8.6946131600557083e-4, 7.9432100481173670e-3, 2.2762268008821528e-2, 4.6905089442046113e-2, 8.3540969140033974e-2, 1.3944000606052487e-1, 2.3321688545945671e-1], [-1.7761385870822353e-5, -1.6341098770875442e-4, -4.7515943127925337e-4, -1.0022506053289210e-3, -1.8475392666775404e-3, -3.2428519688651605e-3, -5.8701086630048194e-3], [1.8141510280270287e-7, 1.6808790616256991e-6, 4.9594461555000520e-6, 1.0707860147280102e-5, 2.0429505289756301e-5, 3.7708291863556249e-5, 7.3875816597925037e-5], [-1.8529770010222434e-9, -1.7289868076969759e-8, -5.1763901861497519e-8, -1.1440079788834912e-7, -2.2590301267844461e-7, -4.3847677566507705e-7, -9.2973343277372574e-7], [1.8926339170622964e-11, 1.7784714257187071e-10, 5.4028241297774045e-10, 1.2222369714844721e-9, 2.4979641167711437e-9, 5.0986632726118448e-9, 1.1700774296977378e-8], [-1.9331395597670301e-13, -1.8293723225748722e-12, -5.6391631093438003e-12, -1.3058153806947121e-11, -2.7621697713071874e-11, -5.9287899862084842e-11, -1.4725523932205040e-10], [1.9745120933565420e-15, 1.8817300329976172e-14, 5.8858404067826281e-14, 1.3951090076974806e-13, 3.0543200337822147e-13, 6.8940718029727331e-13, 1.8532197064424978e-12], [-2.0167700707966943e-17, -1.9355862518469389e-16, -6.1433082573393489e-16, -1.4905086677131798e-15, -3.3773705605171956e-15, -8.0165136790312460e-15, -2.3322927565488261e-14], [2.0599324421184801e-19, 1.9909838673136540e-18, 6.4120386786553453e-18, 1.5924319004965250e-17, 3.7345896228565773e-17, 9.3217032550162135e-17, 2.9352102631650270e-16], [-2.1040185629926530e-21, -2.0479669950982726e-20, -6.6925243362076928e-20, -1.7013247978140432e-19, -4.1295911719796044e-19, -1.0839394162352997e-18, -3.6939870712254696e-18], [2.1490482079045810e-23, 2.1065810125591518e-22, 6.9852794474214489e-22, 1.8176639562415801e-21, 4.5663714008423748e-21, 1.2604184298537725e-20, 4.6489141352371373e-20], [-2.1950411436032238e-25, -2.1668721532729459e-24, -7.2908396010419492e-24, -1.9419583921510860e-23, -5.0493488552685158e-23, -1.4656303995594573e-22, -5.8506978760160039e-22], [2.2420553870531471e-27, 2.2289430396941766e-26, 7.6099101291162862e-26, 2.0747870111263093e-25, 5.5834656412060708e-25, 1.7042627628596961e-24, 7.3631695390147679e-24], [-2.3014092463449714e-29, -2.2998112747568283e-28, -7.9648890843846141e-28, -2.2204039725652061e-27, -6.1807251924066275e-27, -1.9827399033447458e-26, -9.2673688729138993e-26]],
        [[8.3532290210238804e-4, 7.6292104989543677e-3, 2.1849756068338450e-2, 4.4982126171322045e-2, 8.0001195804687973e-2, 1.3324022933856143e-1, 2.2203445305460616e-1], [-1.6394137991066089e-5, -1.5074812433738125e-4, -4.3782967282292275e-4, -9.2176524692796766e-4, -1.6943066704249257e-3, -2.9609303154974772e-3, -5.3207558817600529e-3], [1.6087656629170978e-7, 1.4893413279364335e-6, 4.3866581806376406e-6, 9.4443198083627354e-6, 1.7941451153147511e-5, 3.2899629401548458e-5, 6.3752365373498261e-5], [-1.5786904804580010e-9, -1.4714196948382356e-8, -4.3950356013302331e-8, -9.6765610267798465e-8, -1.8998666244998489e-7, -3.6555592311444723e-7, -7.6386967961619186e-7], [1.5491775406056415e-11, 1.4537137174308332e-10, 4.4034290208024366e-10, 9.9145131894074772e-10, 2.0118178624894721e-9, 4.0617823165438500e-9, 9.1525527565680279e-9], [-1.5202163324761948e-13, -1.4362208006729866e-12, -4.4118384696079212e-12, -1.0158316731625695e-11, -2.1303659212905080e-11, -4.5131468384997698e-11, -1.0966428462489970e-10], [1.4917965416822906e-15, 1.4189383807502650e-14, 4.4202639783587072e-14, 1.0408115542200774e-13, 2.2558995241149496e-13, 5.0146691276138886e-13, 1.3139782574496242e-12], [-1.4639080466595972e-17, -1.4018639246992939e-16, -4.4287055777252968e-16, -1.0664057048205987e-15, -2.3888303000168477e-15, -5.5719229529440838e-15, -1.5743857418628854e-14], [1.4365409150614579e-19, 1.3849949300357656e-18, 4.4371632984348213e-18, 1.0926292302026632e-17, 2.5295941336376247e-17, 6.1911014672093016e-17, 1.8864014302579855e-16], [-1.4096854002122682e-21, -1.3683289244096182e-20, -4.4456371713318237e-20, -1.1194976070627353e-19, -2.6786525945083616e-19, -6.8790860356777820e-19, -2.2602531650707680e-18], [1.3833319352509258e-23, 1.3518634660748739e-22, 4.4541272287359287e-22, 1.1470266927166009e-21, 2.8364944502698141e-21, 7.6435227136820400e-21, 2.7081957678326201e-20], [-1.3574712029939814e-25, -1.3355957749000107e-24, -4.4626326131946624e-24, -1.1752325689431684e-23, -3.0036370032203525e-23, -8.4929066964432001e-23, -3.2449126591029228e-22], [1.3321056535183862e-27, 1.3195698965688233e-26, 4.4713185493200228e-26, 1.2041618000232899e-25, 3.1806882967952699e-25, 9.4367699906452097e-25, 3.8880122007693928e-24], [-1.3190309003119301e-29, -1.3128018926060834e-28, -4.5006627663140565e-28, -1.2378918019143149e-27, -3.3754512926294358e-27, -1.0495118177475373e-26, -4.6599253309970515e-26]],
        [[8.0376447806737412e-4, 7.3390963855108991e-3, 2.1007600223549717e-2, 4.3210653849038223e-2, 7.6749260641326946e-2, 1.2756841178262340e-1, 2.1187558715832856e-1], [-1.5178907931188995e-5, -1.3950220327647075e-4, -4.0473260252854893e-4, -8.5060036953339705e-4, -1.5593777834988964e-3, -2.7142397591604331e-3, -4.8450694641426730e-3], [1.4332509850242435e-7, 1.3258352048223598e-6, 3.8987908615545132e-6, 8.3720208351632667e-6, 1.5841579784291518e-5, 2.8875085012270990e-5, 5.5397364149428405e-5], [-1.3533308162783315e-9, -1.2600797328359014e-8, -3.7557068758919092e-8, -8.2401484145670684e-8, -1.6093319573848558e-7, -3.0718381883985744e-7, -6.3340019733801828e-7], [1.2778671128962071e-11, 1.1975854369597434e-10, 3.6178740123541101e-10, 8.1103531908217020e-10, 1.6349059780189097e-9, 3.2679349174881236e-9, 7.2421461950005084e-9], [-1.2066113758587832e-13, -1.1381905775043800e-12, -3.4850995569665791e-12, -7.9826024448283780e-12, -1.6608863974250689e-11, -3.4765498603640790e-11, -8.2804965533932017e-11], [1.1393289628153066e-15, 1.0817414363425508e-14, 3.3571978682766327e-14, 7.8568639728652801e-14, 1.6872796737181654e-13, 3.6984821414031181e-13, 9.4677214909152878e-13], [-1.0757983154153019e-17, -1.0280919190757844e-16, -3.2339901177948833e-16, -7.7331060784696108e-16, -1.7140923676394486e-15, -3.9345818986313458e-15, -1.0825166057560569e-14], [1.0158102297246398e-19, 9.7710317693102041e-19, 3.1153040399603884e-18, 7.6112975644433035e-18, 1.7413311441866934e-17, 4.1857535402780563e-17, 1.2377235672404239e-16], [-9.5916716732556600e-22, -9.2864324743222892e-21, -3.0009736913513896e-20, -7.4914077251572638e-20, -1.7690027742946373e-19, -4.4529592092609212e-19, -1.4151834907332954e-18], [9.0568261039816224e-24, 8.8258671422100226e-23, 2.8908392186731196e-22, 7.3734063373636917e-22, 1.7971141366476265e-21, 4.7372224682452253e-21, 1.6180869182063411e-20], [-8.5518013337415117e-26, -8.3881416971115200e-25, -2.7847457246106722e-24, -7.2572623141700938e-24, -1.8256719215264720e-23, -5.0396317962365807e-23, -1.8500817650997498e-22], [8.0753516217434916e-28, 7.9725663914086400e-27, 2.6827004105879133e-26, 7.1432622779931724e-26, 1.8547421502239602e-25, 5.3614345412387903e-25, 2.1153524927610743e-24], [-7.6621196907501791e-30, -7.6415617642580914e-29, -2.6031705532199442e-28, -7.0688980508742131e-28, -1.8905896801734285e-27, -5.7140576197608832e-27, -2.4203154127500895e-26]],
    ],
    [
        [[8.4734530043501360e-3, 8.0096047597962267e-2, 2.4675221776056923e-1, 5.7360911478704885e-1, 1.2335736880399871e+0, 2.7723042408201583e+0, 7.6729147496430703e+0, 43.012442238177205e+0], [-6.1888525907467350e-4, -5.8771009541523364e-3, -1.8265443504082800e-2, -4.2976235513887783e-2, -9.3721838284017192e-2, -2.1359118761256087e-1, -5.9815542434507136e-1, -3.3780976169406216e+0], [1.6860293779011080e-5, 1.5423003969863292e-4, 4.4399268353088582e-4, 9.2787832111081329e-4, 1.7207551269113332e-3, 3.2106325309926008e-3, 7.2679921250758676e-3, 3.4782266765105891e-2], [-4.0515700096446848e-7, -3.3390067128012207e-6, -7.6369056345445793e-6, -1.0550930197227592e-5, -9.1444064547065740e-6, -1.9986652378691008e-6, 8.9614489833833076e-6, 1.8085412359089034e-5], [9.0276089409402641e-9, 6.0326774103387333e-8, 7.3883283777335612e-8, -3.3115107315719786e-8, -2.1261852750125749e-7, -2.6681045989495742e-7, -4.4642745385546490e-8, 2.9321199935831124e-7], [-1.9045338423122642e-10, -8.5411463162512517e-10, 4.7211325199419107e-10, 3.0027260704044202e-9, 1.2620556139915756e-9, -4.9326285317770529e-9, -5.1361810784864506e-9, 3.9299126510151635e-9], [3.8371776217013587e-12, 6.9029251959700905e-12, -3.3880815938381713e-11, -1.5093158579000819e-11, 8.8229695499743990e-11, 1.3429079781538151e-11, -1.4354671022653230e-10, 2.9769735890045756e-11], [-7.4078352422475002e-14, 7.8288935888853673e-14, 5.5232002019308008e-13, -1.1463809473656485e-12, -2.3380341414958018e-13, 2.4790514211726669e-12, -2.1957058636282247e-12, -5.1728776994232281e-13], [1.3679663497794127e-15, -4.9258997006871328e-15, 2.0809728829508142e-15, 1.9597739618997672e-14, -4.5266629841975714e-14, 3.8704960374447605e-14, -1.2530990543497885e-15, -3.3121890032185518e-14], [-2.4042042858608664e-17, 1.2431864491038121e-16, -3.0581037220501832e-16, 3.6945412603593698e-16, -3.2052059315880602e-17, -6.0533803155101351e-16, 1.0341994776493970e-15, -1.0708175109335080e-15], [3.9697074568455301e-19, -1.9623029634323993e-18, 6.3240100023878510e-18, -1.4948318645522048e-17, 2.5602858491462274e-17, -3.3042581472459703e-17, 3.3037273542770884e-17, -2.7384953397545443e-17], [-6.0170649494665962e-21, 1.0500916674541040e-20, 1.1843468104480480e-21, -3.2127982101317660e-20, 1.0424504543641121e-19, -2.7279593363166471e-19, 4.9509360452219197e-19, -6.0199123177027028e-19], [7.8708642255405913e-23, 5.2489295920020728e-22, -3.3758856446277936e-21, 9.1137820172935630e-21, -1.5337015346511040e-20, 1.4608089610886924e-20, -2.3802726384651217e-21, -1.1716528152527835e-20], [-7.4034642089268111e-25, -2.2558900041874965e-23, 8.4052330053465781e-23, -9.3201805636246664e-23, -1.1792430588992215e-22, 4.4632973327496450e-22, -3.6120655051872386e-22, -2.1344975654276067e-22]],
        [[7.3567298737033150e-3, 6.9459569083870798e-2, 2.1349756367367499e-1, 4.9467527537133159e-1, 1.0595094639011905e+0, 2.3706749549488399e+0, 6.5350738267891340e+0, 36.535252756228582e+0], [-5.0125508817942421e-4, -4.7883612818232685e-3, -1.5059520425447734e-2, -3.6064273210191427e-2, -8.0449918056334606e-2, -1.8808189334799397e-1, -5.3960260602401416e-1, -3.0988854387317999e+0], [1.2753836179360750e-5, 1.1942014203422291e-4, 3.5962553595431986e-4, 7.9997966592497410e-4, 1.5918034495735649e-3, 3.1579057311589531e-3, 7.3671914346513559e-3, 3.5030139745236687e-2], [-2.8680961138011545e-7, -2.5009625407742135e-6, -6.4181355087591166e-6, -1.0629538607869628e-5, -1.2234437290128852e-5, -7.0135733161945720e-6, 7.2177444698958648e-6, 2.3436788842983637e-5], [5.9939861453316689e-9, 4.5002353632183443e-8, 7.6448772373320252e-8, 2.1120590729131459e-8, -1.6755728362180355e-7, -3.5601398841637055e-7, -1.8663850058545784e-7, 3.7697938166358027e-7], [-1.1900672373854986e-10, -6.7632922969265256e-10, -1.5639032209560464e-10, 2.3343961835114117e-9, 3.1433037808595280e-9, -3.6669745917988624e-9, -9.2791007684266923e-9, 4.3061380771583027e-9], [2.2648700937485098e-12, 7.4598139396457344e-12, -1.8801378811254880e-11, -3.7217358715444539e-11, 6.2626251681373598e-11, 9.5026097214421525e-11, -1.9795007475561612e-10, -7.2122879040469126e-12], [-4.1543915115612076e-14, -2.1675484525181159e-14, 4.8943621226975668e-13, -4.1783601360175541e-13, -1.5074082104901155e-12, 3.1058911735276770e-12, -1.3479320565118960e-12, -2.4690098851366972e-12], [7.3358988053541413e-16, -1.7092267095211642e-15, -4.6893124118748142e-15, 2.2795527005512930e-14, -2.8885264039852595e-14, -7.3313540908474480e-15, 6.4064209326974230e-14, -9.9627557024762769e-14], [-1.2481667649401137e-17, 5.9242652222881739e-17, -8.5164254990641415e-17, -1.5207468776784173e-16, 8.6613810744081202e-16, -1.8868196192889336e-15, 2.6662043600600130e-15, -2.9099162227095985e-15], [2.0205538548301707e-19, -1.2477466823526691e-18, 4.1919183669678793e-18, -9.2248821818700645e-18, 1.4386892609499744e-17, -2.2684339946054915e-17, 4.2645409249191879e-17, -7.1162351141126136e-17], [-3.1234553662778607e-21, 1.7250782799291410e-20, -7.1780845004510425e-20, 2.2715849044310681e-19, -5.5036164936128288e-19, 8.4786406102635260e-19, -3.4303694876489988e-19, -1.5036860121295819e-18], [4.3784782676066731e-23, -8.5347914746905775e-23, -9.2272377719018735e-23, 1.2475808590887806e-21, -7.5877971850194696e-21, 2.6731146100318423e-20, -3.7813871915673692e-20, -2.4720716091924704e-20], [-5.2960947420075406e-25, -3.9837880568347097e-24, 3.7171492505293381e-23, -1.4779398471064542e-22, 3.6660168069005709e-22, -1.6655505183412422e-22, -9.2787867284538766e-22, 2.7449662048173015e-23]],
        [[6.4463942158616006e-3, 6.0751172807977797e-2, 1.8602607240819595e-1, 4.2854883081198344e-1, 9.1085041236074308e-1, 2.0194364630091659e+0, 5.5150342057184005e+0, 30.618690161309724e+0], [-4.1152438473496614e-4, -3.9417719261738164e-3, -1.2470167775604965e-2, -3.0165689975148474e-2, -6.8343088142928765e-2, -1.6325676163926872e-1, -4.8038521225711861e-1, -2.8174104802822771e+0], [9.8175895406365308e-6, 9.3313167741435936e-5, 2.8977629566166045e-4, 6.7582879142616457e-4, 1.4312009476145062e-3, 3.0376244913178222e-3, 7.4289043881717629e-3, 3.5350299845175144e-2], [-2.0734611007424566e-7, -1.8797053712784701e-6, -5.2401663576698332e-6, -9.9692179161891329e-6, -1.4346592155704494e-5, -1.3144356246112117e-5, 2.4813219670428893e-6, 3.0116589647612132e-5], [4.0753298692926722e-9, 3.3192244268580071e-8, 6.9822747132137673e-8, 5.8325536915260220e-8, -9.3486805419718753e-8, -3.9992225235604700e-7, -4.2117353500437551e-7, 4.5341600208900790e-7], [-7.6321382825432923e-11, -5.0909584722215690e-10, -4.6195623924601508e-10, 1.3760995475162715e-9, 4.0669286831718213e-9, -4.3611249997951141e-10, -1.4152112879562256e-8, 2.8232137799974223e-9], [1.3724685100169386e-12, 6.3472664766769555e-12, -7.4633155357321476e-12, -3.9920979194848952e-11, 1.2664302811972026e-11, 1.6777000252427256e-10, -1.9057201055094681e-10, -1.4148260126535650e-10], [-2.3933979565399358e-14, -5.0487046862594673e-14, 3.1665977121078102e-13, 1.7244036541563382e-13, -1.8726282601950415e-12, 1.7023971340264026e-12, 2.4988664233361103e-12, -8.0295261426432652e-12], [4.0160954649320177e-16, -3.0627806002073649e-16, -5.4698772980980875e-15, 1.3077140040043546e-14, 6.3698742567300516e-15, -7.9649093323888090e-14, 1.8106290816238017e-13, -2.7402776759899419e-13], [-6.6130504976386832e-18, 2.2895690793822583e-17, 2.3270562493453955e-17, -3.2595042500945920e-16, 9.2183438518130019e-16, -1.7432474500336997e-15, 3.3791813275792746e-15, -7.3074924329094725e-15], [1.0292617905565416e-19, -6.1329876049697091e-19, 1.4198876797522214e-18, -2.5372145920905663e-21, -1.0765293206130336e-17, 3.4693155891274098e-17, -2.7055680395455486e-17, -1.4747556969358233e-16], [-1.5228980238273080e-21, 1.1480956371084988e-20, -4.7011319472967714e-20, 1.5988957717895716e-19, -4.4191367149433720e-19, 1.4732119828113957e-18, -3.0341118011757550e-18, -1.1005337642553399e-18], [2.5963620799884264e-23, -1.0620983577587418e-22, 8.4185637381411897e-22, -2.8012116679835875e-21, 1.0770999560783906e-20, -8.5231926898449888e-21, -6.0862339265000035e-20, 9.0653813717075278e-20], [-1.8741141616913665e-25, 1.7211237772402768e-24, 4.0613983620578422e-24, -8.9424890181786941e-24, 2.1980885129983565e-22, -1.0304167665256161e-21, 6.5565226422491747e-22, 5.6666848545250190e-21]],
        [[5.6947196915687151e-3, 5.3548600673596306e-2, 1.6321773245396500e-1, 3.7325762199513637e-1, 7.8505481410497526e-1, 1.7166481585171266e+0, 4.6136933470807246e+0, 25.267904878229034e+0], [-3.4193320701847528e-4, -3.2771866411033310e-3, -1.0385245445330730e-2, -2.5219952967263176e-2, -5.7601341940055654e-2, -1.3969465801518827e-1, -4.2097238806723378e-1, -2.5330365273969076e+0], [7.6755277767940137e-6, 7.3632623376983818e-5, 2.3326827531470993e-4, 5.6254326250573890e-4, 1.2527578483548592e-3, 2.8419509288886373e-3, 7.4081984646108672e-3, 3.5756233165237720e-2], [-1.5276684024127749e-7, -1.4223002493267579e-6, -4.2039757570427909e-6, -8.8655344276287546e-6, -1.5192213935154825e-5, -1.9383718292511137e-5, -6.7334207852515574e-6, 3.7540680674306190e-5], [2.8306783323177470e-9, 2.4416132822980957e-8, 5.9412818070887626e-8, 7.6856931525080567e-8, -1.3120074055066323e-8, -3.6620891766926588e-7, -7.4047542736855758e-7, 4.5141123887763972e-7], [-5.0166162769020571e-11, -3.7421727121902624e-10, -5.5337807201469046e-10, 5.1267704700874365e-10, 3.7916390654815950e-9, 3.8288443547748456e-9, -1.7133854512955093e-8, -4.5451473592307715e-9], [8.5145650421297246e-13, 4.8919113173685152e-12, -8.6313899166679068e-13, -3.0930121250418509e-11, -3.2689593845329618e-11, 1.7289522453082024e-10, -2.4416198985803004e-11, -5.3668933471737618e-10], [-1.4207425492018194e-14, -5.0923071133378459e-14, 1.6266504526043210e-13, 4.1456377637757340e-13, -1.2487293330433594e-12, -1.4707284870927797e-12, 9.7270806641553852e-12, -2.2111641776125585e-11], [2.2460185212064970e-16, 1.8684839328011835e-16, -3.9987482096716365e-15, 2.6835821458841889e-15, 2.8690896983542338e-14, -1.0426676995986291e-13, 2.4501393522110986e-13, -6.3362794288815534e-13], [-3.5014706002094226e-18, 7.2830114377551916e-18, 5.0660758143139541e-17, -2.2357005904699282e-16, 2.7694586242374963e-16, 6.3775658952234634e-16, -9.6726691902190723e-16, -1.1539870221726955e-14], [6.0114005435600880e-20, -1.9021658783479441e-19, 2.3183744815753930e-19, 4.2556698329935391e-18, -1.7051601627349531e-17, 7.2926680775594960e-17, -1.9500067174082937e-16, 3.9698612544512239e-17], [-5.0490523130865200e-22, 8.2291512897225624e-21, -8.9655198324789219e-21, 4.2069060819935063e-20, 1.4673232125517187e-19, -5.9593000820437190e-20, -3.5304958765451232e-18, 1.3307249323217551e-17], [1.5104697415903387e-23, -5.2312542043911241e-23, 5.9382747479598398e-22, -1.8771194179442892e-21, 9.7294407803872082e-21, -4.7699033976238715e-20, 7.1947937046133730e-20, 5.3855313030393215e-19], [-3.3981392139996297e-25, -8.5988594047537809e-25, -1.3469599473284435e-23, 1.9179320499260489e-23, -2.3241033132233529e-22, -1.7330683073115438e-22, 4.1276103748152804e-21, 8.2123494104402837e-21]],
        [[5.0669497501146913e-3, 4.7533578571632406e-2, 1.4416448896080050e-1, 3.2699628923758650e-1, 6.7929796331042554e-1, 1.4591922577059096e+0, 3.8305991359249137e+0, 20.489386741504191e+0], [-2.8716150451638759e-4, -2.7502845917943961e-3, -8.7055715315321607e-3, -2.1123710196368134e-2, -4.8306638898928377e-2, -1.1798188880292115e-1, -3.6225714289175250e-1, -2.2450746094870189e+0], [6.0842203692266986e-6, 5.8681359804046348e-5, 1.8815897452021439e-4, 4.6375385315464783e-4, 1.0715283366875955e-3, 2.5773939953367018e-3, 7.2451896274429116e-3, 3.6244105661200114e-2], [-1.1451425261341733e-7, -1.0856077474964440e-6, -3.3417261537340024e-6, -7.5900900274560934e-6, -1.4848046391763803e-5, -2.4425311671779909e-5, -2.1246731647295590e-5, 4.3079946071472000e-5], [2.0032428344062791e-9, 1.7994734920264456e-8, 4.8439644034432949e-8, 8.0650551972754180e-8, 5.2594587800314605e-8, -2.5326057329609706e-7, -1.0627248606866099e-6, 1.6824108746885630e-7], [-3.3793506001595165e-11, -2.7303959873322888e-10, -5.3215979508444625e-10, -8.6848976861620347e-11, 2.6962038552107314e-9, 7.1476096134285743e-9, -1.3657515208339918e-8, -2.7481872463623194e-8], [5.3842694773039176e-13, 3.5825512125053690e-12, 2.1844679007045465e-12, -1.9082219092358452e-11, -5.4135181863908937e-11, 9.2242058027398079e-11, 3.4041444303316551e-10, -1.4908883118284272e-9], [-8.6067124676182153e-15, -4.1566377818045185e-14, 6.5285481184077739e-14, 4.0664387195841198e-13, -2.8389779865338886e-13, -3.9219078008746193e-12, 1.5293154369627558e-11, -4.7086301361289509e-11], [1.3784923652894802e-16, 3.9010905273687228e-16, -2.0488414692673872e-15, -2.0806032794553213e-15, 2.8824296283895072e-14, -3.5435894201049597e-14, 4.7173418590264940e-14, -8.0342770526747598e-13], [-1.4080031566075016e-18, 5.8045962864608460e-18, 5.7345191299608334e-17, -4.0994994536866204e-17, -1.8918443715091906e-16, 2.8553710303592221e-15, -1.0113082202390201e-14, 1.0113879246204767e-14], [4.5527291277492319e-20, 7.5059055700542767e-20, 1.4680685798588580e-19, 4.2661868772731805e-18, -5.4294072111594188e-18, 2.3910368272945767e-17, -2.0287448580405792e-16, 1.2416127467608513e-15], [-3.8638241705493422e-22, 2.3874757660448792e-21, -3.2458023950329269e-21, -4.2957891540389782e-20, 2.5988662275199757e-19, -1.9346855937979322e-18, 4.4406585891341688e-18, 3.9021739736490553e-17], [-1.3101183438178523e-23, -2.2811689524424825e-22, -4.3304046323492024e-22, -2.0130643733244923e-21, -5.0605985204795569e-21, -1.9332772940195018e-20, 2.2067588761755092e-19, 2.0400409759350789e-19], [-6.5010528865495497e-25, -4.8571719004364851e-24, -2.1681023255074305e-23, -1.7604909988815338e-23, -2.3939077642840655e-22, 1.0709304195481305e-21, -4.4004357749874158e-22, -2.9631847966473230e-20]],
        [[4.5373023696758596e-3, 4.2464406561016986e-2, 1.2814041255309640e-1, 2.8818578368313907e-1, 5.9070519350200603e-1, 1.2428783822501944e+0, 3.1630235183187337e+0, 16.290822748524546e+0], [-2.4348672030622481e-4, -2.3284348384137147e-3, -7.3483147535188692e-3, -1.7756341775232499e-2, -4.0429179224567071e-2, -9.8592583230649250e-2, -3.0562168670212881e-1, -1.9530649791066590e+0], [4.8821278864194976e-6, 4.7215473653052419e-5, 1.5236789948175343e-4, 3.8028753742990359e-4, 8.9994861888323564e-4, 2.2649794479614267e-3, 6.8810260746408376e-3, 3.6751447417999133e-2], [-8.7240672178947607e-8, -8.3707432086002789e-7, -2.6484759274580244e-6, -6.3347311996101533e-6, -1.3646651731703003e-5, -2.7251974345220701e-5, -3.9847732733498522e-5, 3.8938386478985751e-5], [1.4394948702550889e-9, 1.3307672515764655e-8, 3.8438693449300167e-8, 7.5215336348125983e-8, 9.3390341392938059e-8, -9.7314150082345762e-8, -1.2202006667579375e-6, -8.5807363700789831e-7], [-2.3300017119589079e-11, -1.9939921337569535e-10, -4.6327307333474497e-10, -4.1602421570162237e-10, 1.3984595921803549e-9, 8.0127988028245915e-9, -5.5817108379452016e-10, -8.1228001508061849e-8], [3.5381429204902528e-13, 2.6291018435036504e-12, 3.4089529643234399e-12, -8.6456373441438010e-12, -5.0391644507131188e-11, -1.7686161028054061e-11, 7.2692755072560533e-10, -3.0270986916518209e-9], [-4.7039620998366534e-15, -2.5181203237624702e-14, 3.3094206001384614e-14, 3.4387374709809663e-13, 5.0422940450752989e-13, -3.4010676090564777e-12, 9.9645771275872996e-12, -5.4148136452307231e-11], [1.1335486524089357e-16, 6.4314844669954073e-16, 5.3632336227864216e-18, -1.2186007811859695e-15, 1.9958746923190469e-14, 6.3074229697520507e-14, -3.9062084647045119e-13, 8.4003096636973195e-13], [-2.1779557366572022e-19, 6.9080302252520969e-18, 5.0872649878301251e-17, 6.1005973854779013e-17, -2.8106610905335127e-16, 2.0400421207187948e-15, -1.1691223548367368e-14, 8.9236414650279308e-14], [4.7950137247107206e-21, -1.3253747911009067e-19, -7.6468554989931024e-19, 5.1580944856300532e-20, -2.1657747275196613e-18, -6.1568854227492885e-17, 1.6775203228681269e-16, 2.3557585640767153e-15], [-1.6111848261736782e-21, -1.2740824320557504e-20, -4.2320246204884727e-20, -1.4777329161385147e-19, -1.3592349875620840e-19, -1.5247041487448314e-18, 1.0068494614137198e-17, -1.2059363972818681e-17], [-3.0184494659200603e-23, -3.3088745138575615e-22, -9.1584051574698759e-22, -1.8110446838885217e-21, -8.0315633529537384e-21, 3.2971455858276564e-20, -6.5373621080892110e-20, -2.7032995165469540e-18], [2.3905019467769657e-25, 3.3053833710419327e-24, 1.0193316138612767e-23, 4.3756599461588255e-23, 1.4347854276596156e-22, 6.9968187796522212e-22, -9.0438653996784590e-21, -6.8388062830871404e-20]],
        [[4.0863256130283294e-3, 3.8155820533693824e-2, 1.1456901936984313e-1, 2.5548866876737036e-1, 5.1654693195854986e-1, 1.0627666398310680e+0, 2.6050833974070625e+0, 12.679920394561933e+0], [-2.0825831812846134e-4, -1.9875527544996221e-3, -6.2467167396417426e-3, -1.4998339590229390e-2, -3.3857499980093256e-2, -8.1795423882947096e-2, -2.5281240146728809e-1, -1.6575690523420007e+0], [3.9594429879541296e-6, 3.8327071152270455e-5, 1.2398584540638182e-4, 3.1118914616797232e-4, 7.4588036281862074e-4, 1.9337502655928431e-3, 6.2886045393335549e-3, 3.7068753984517180e-2], [-6.7512900325749143e-8, -6.5282263300456789e-7, -2.1028010437002849e-6, -5.2059057228630407e-6, -1.1988393355608689e-5, -2.7577610233829263e-5, -5.8447254921373165e-5, 7.8484251323708019e-6], [1.0498215156875362e-9, 9.9063217318433613e-9, 3.0072623427923729e-8, 6.5584614368087756e-8, 1.1073902435411265e-7, 5.2379537980239564e-8, -1.0430198504191404e-6, -3.3015065957253351e-6], [-1.5988891720984912e-11, -1.4227456749508886e-10, -3.6894065621041903e-10, -5.1067775664197994e-10, 4.2031033720040318e-10, 6.7218448215537351e-9, 1.8500574361972542e-8, -1.6549068914865523e-7], [2.7105796286103558e-13, 2.2346990054760397e-12, 4.5468835170750352e-12, 6.9061174081847989e-13, -2.9066971972035633e-11, -7.7611193125648394e-11, 7.8135982780312720e-10, -3.5735222418705439e-9], [-1.3255297690329479e-15, -2.9782711185743859e-15, 5.2384436837616975e-14, 3.2662259053360026e-13, 9.4728608795921667e-13, -7.8205384655700245e-13, -7.2288430967468621e-12, 3.8547783559868555e-11], [8.8716589717473663e-17, 6.2690700961824961e-16, 7.4569357280398599e-16, -6.9987751891311506e-16, 6.0821845795813635e-15, 8.0992130557150529e-14, -6.0400807307053738e-13, 5.1954622605754837e-12], [-1.7623128403195271e-18, -1.3073683906582596e-17, -2.6038859880815758e-17, -8.0306933651603230e-17, -5.6152648505763767e-16, -1.2044487292526593e-15, 1.4137424587008895e-15, 1.2475961806110791e-13], [-8.5676093194212092e-20, -9.0817960117216470e-19, -3.1639592076148293e-18, -7.0501681147590906e-18, -1.2479900344892922e-17, -8.5298702498867286e-17, 3.9620503062827796e-16, -1.9001640169782303e-15], [-2.0362769364476392e-21, -1.7747172390590347e-20, -5.1493653375186849e-20, -1.3401793586361282e-19, -2.1130240179773986e-19, 5.5269661228428725e-19, -1.9678384831395034e-18, -1.8624746638590633e-16], [2.8751377046619790e-23, 2.7277421760879246e-22, 1.0071097794603019e-21, 3.3496238167620165e-21, 7.0515304693506503e-21, 4.7151335558943310e-20, -3.3191309006685661e-19, -3.0458219050001382e-18], [2.1287272569892719e-24, 2.0774742235395390e-23, 6.5207946822009991e-23, 1.5607850485103794e-22, 3.9872712766694897e-22, -3.8554747311782320e-24, 2.6861902153827524e-21, 1.0602604761805728e-19]],
        [[3.6991059954601633e-3, 3.4464295709541434e-2, 1.0299299632931285e-1, 2.2779577176601029e-1, 4.5436497159767677e-1, 9.1361421179721793e-1, 2.1473685819861080e+0, 9.6608138034585902e+0], [-1.7955989131533728e-4, -1.7097744798825195e-3, -5.3481043354912703e-3, -1.2741626189907576e-2, -2.8435340890667567e-2, -6.7625358150259435e-2, -2.0555849027664528e-1, -1.3618187722919199e+0], [3.2406405797382982e-6, 3.1359747691325853e-5, 1.0141634644673689e-4, 2.5468854010215407e-4, 6.1283021285337981e-4, 1.6119467477700474e-3, 5.5023391501152789e-3, 3.6723587622169076e-2], [-5.2928379482317727e-8, -5.1416722494129466e-7, -1.6742136121438762e-6, -4.2343509848415029e-6, -1.0178084399487665e-5, -2.5768153585139459e-5, -7.1263089011242270e-5, -7.5364466876700234e-5], [7.9340237594401441e-10, 7.5992581237458948e-9, 2.3910663406957958e-8, 5.6245366579504504e-8, 1.1433845237200155e-7, 1.6767981727835329e-7, -5.1259402293157161e-7, -7.2701213335896915e-6], [-9.6939732904468732e-12, -8.8092131360697828e-11, -2.4134327419849205e-10, -3.9172029500583703e-10, 4.0567251756825207e-11, 4.8275819150507103e-9, 3.2787804554537457e-8, -2.1631934735745847e-7], [2.5861894224362837e-13, 2.3044784207508413e-12, 6.0135715502732113e-12, 8.6525974039502230e-12, -3.6062468847558225e-12, -7.3965259881907231e-11, 3.3563135470874743e-10, 3.0333691542096698e-10], [-2.9524326548355497e-16, 1.4263763682737763e-15, 3.3809225891726622e-14, 1.9617003753170413e-13, 7.1314175445815130e-13, 5.4510749113069128e-13, -2.3090667567292103e-11, 2.4455253434864553e-10], [-5.0852207639872874e-17, -6.1734153683992436e-16, -2.7823010593448654e-15, -9.4141735644245461e-15, -2.3864611565454032e-14, -1.1798998930629134e-14, -3.2302820951978422e-13, 6.1700543239921038e-12], [-6.0912824275651964e-18, -5.6495999319947148e-17, -1.6917333275371426e-16, -3.9910726409005401e-16, -1.0661185093256935e-15, -3.4529648122485436e-15, 1.2087186877180681e-14, -1.2681386444511817e-13], [-9.4859506303170003e-20, -9.1906276736791668e-19, -2.8715022438542688e-18, -5.9434509739919894e-18, -6.1489638669479677e-18, -9.5946116105205728e-18, 9.7864083353279543e-17, -9.9588094868009038e-15], [2.9840788316198450e-21, 3.0282449686915823e-20, 1.0482894064799026e-19, 2.7527534620774824e-19, 7.0133647202059585e-19, 2.9891321880516090e-18, -6.8858181439071141e-18, -7.9022852364162337e-17], [1.9854776499058280e-22, 1.8931807912972959e-21, 5.9835418465061789e-21, 1.4648820226240006e-20, 3.2183271779935014e-20, 6.0062062869920206e-20, 2.3272443352768365e-19, 9.2014049347256798e-18], [3.9915541767424568e-24, 3.7596688096516649e-23, 1.1336012550854709e-22, 2.4811501383556208e-22, 4.9999389694393334e-22, 5.1884528199208946e-22, 1.3759259348189717e-20, 2.7638513661531988e-19]],
        [[3.3640440368270143e-3, 3.1277469354663896e-2, 9.3048879803162196e-2, 2.0419957895555599e-1, 4.0203215457071771e-1, 7.9031652763703996e-1, 1.7774978381730110e+0, 7.2264979720814357e+0], [-1.5597210426685243e-4, -1.4816240884606028e-3, -4.6109474165619586e-3, -1.0892583925630982e-2, -2.3990090257217214e-2, -5.5914317728582306e-2, -1.6504830823265099e-1, -1.0739383569490046e+0], [2.6763393488448345e-6, 2.5870747311559848e-5, 8.3487596860273149e-5, 2.0905713330351829e-4, 5.0169505001301766e-4, 1.3217091180000551e-3, 4.6203910990700754e-3, 3.4986947561343085e-2], [-4.1456635710527575e-8, -4.0372120735439108e-7, -1.3223527599814217e-6, -3.3847421102800630e-6, -8.3420997588619792e-6, -2.2406332294879546e-5, -7.4016389825074168e-5, -2.2325365315196200e-4], [6.5904692603310518e-10, 6.3735938432591916e-9, 2.0525994017425632e-8, 5.0696874235965131e-8, 1.1530545163901653e-7, 2.4702190533989847e-7, 1.6707850282294087e-7, -1.0881722351156998e-5], [-3.9891528686620579e-12, -3.6572880848193942e-11, -1.0181066376484574e-10, -1.6626429699835375e-10, 7.2219190281085939e-11, 3.0827438919179512e-9, 3.2335721060104466e-8, -1.1152509482680059e-7], [1.9180997817119483e-13, 1.7355363401714554e-12, 4.7204318136777034e-12, 7.6455001907238084e-12, 5.8077700069353637e-14, -8.1454062144847769e-11, -3.8692364095885039e-10, 8.6867288361695510e-9], [-5.7129492233080762e-15, -5.3517856234202417e-14, -1.6004380350483275e-13, -3.4328302469097438e-13, -6.2173215181718706e-13, -1.5854100396323413e-12, -2.6024468394083230e-11, 2.9469173180084263e-10], [-2.7684659919811526e-16, -2.7072054144902762e-15, -8.9379888382327927e-15, -2.3007773384702206e-14, -5.4641224641676808e-14, -1.0333387782409555e-13, 1.5321288000693162e-13, -4.9405896073858589e-12], [-3.9062463561172537e-18, -3.4773254659029585e-17, -9.2440844526766171e-17, -1.5769262558990865e-16, -1.8847213973673365e-16, -3.4535700237889522e-16, 1.4906898647784071e-14, -4.3020435505260712e-13], [2.9133932195465342e-19, 2.8286209228496603e-18, 9.2408196488624381e-18, 2.3886613684620150e-17, 6.2070028932842779e-17, 1.8252906736523123e-16, 1.7538386970586529e-16, -8.6625651236378401e-16], [1.4298987738771529e-20, 1.3695050833615882e-19, 4.3203560082957260e-19, 1.0305506873380664e-18, 2.2324953565273036e-18, 5.1051691016657060e-18, 9.3965973775725562e-18, 4.8568439736425476e-16], [1.3071911614139770e-22, 1.1787145551967079e-21, 3.2407126470611538e-21, 5.8772711339961655e-21, 5.5363853355575423e-21, -3.4752779778871329e-20, 5.2718035415817639e-20, 7.7399720049315274e-18], [-1.3001214418384257e-23, -1.2633430943721148e-22, -4.1252683663564536e-22, -1.0541765310697986e-21, -2.5912933524269379e-21, -6.8928323661997772e-21, -3.0433507106699056e-20, -4.4728860414166503e-19]],
        [[3.0720585445772877e-3, 2.8507040114725495e-2, 8.4448494464229118e-2, 1.8396784246718869e-1, 3.5777071967376149e-1, 6.8826014574612370e-1, 1.4816134306887488e+0, 5.3478858657950724e+0], [-1.3637683157306431e-4, -1.2923472639721011e-3, -4.0010612301712628e-3, -9.3690151709350259e-3, -2.0345520782293486e-2, -4.6345064096844040e-2, -1.3154781412797091e-1, -8.0780270173506006e-1], [2.2401120527701075e-6, 2.1619322120067286e-5, 6.9537018844619773e-5, 1.7321717199396069e-4, 4.1268258961455502e-4, 1.0781811845369728e-3, 3.7673033031596538e-3, 3.1232848055966222e-2], [-3.1373057339905886e-8, -3.0602265562625165e-7, -1.0061832522109714e-6, -2.5949748183923594e-6, -6.4949312414996994e-6, -1.8088349732299779e-5, -6.6904785412655578e-5, -4.0157061757663596e-4], [6.0700803350778699e-10, 5.8855732487071854e-9, 1.9091864899580362e-8, 4.8006662055546014e-8, 1.1438294105323141e-7, 2.8376666129266736e-7, 6.6710766702300596e-7, -1.0509441907637177e-5], [-2.3253069412953602e-12, -2.2775883625205723e-11, -7.4229066110413566e-11, -1.7783012667539580e-10, -3.1753586427222155e-10, 2.6976305355175757e-10, 1.5420419987366444e-8, 1.6465631211482240e-7], [-9.0207030462346231e-14, -9.4086703589609251e-13, -3.5464080601182257e-12, -1.1321123593702550e-11, -3.8409610093946780e-11, -1.6185047637047316e-10, -9.5295098190756445e-10, 1.2605751519264272e-8], [-1.3374166648974696e-14, -1.2693490822603798e-13, -3.9249281456308556e-13, -9.0346414167168696e-13, -1.8295928736326199e-12, -3.3407066219125130e-12, -1.0614630796123396e-11, -7.3618443179336566e-11], [-6.5985109455987939e-17, -5.7679817262058696e-16, -1.4473957199168047e-15, -1.8887817971754557e-15, 2.6641890682119325e-15, 5.2581409176386747e-14, 8.7011376617661279e-13, -1.5648838517864098e-11], [1.8340072004720676e-17, 1.7849117345108113e-16, 5.8385168511752947e-16, 1.4898344689320112e-15, 3.6289100251012033e-15, 9.1624327284361484e-15, 2.3675799757727795e-14, -3.0757561689660114e-14], [6.4974321989772333e-19, 6.1569961556737375e-18, 1.9011728066096869e-17, 4.3981229881723304e-17, 9.1910427474286162e-17, 1.8471686556785366e-16, -8.5081789420639684e-17, 1.8347207306335793e-14], [-9.9964822189249784e-21, -1.0067906443008536e-19, -3.5311187920161308e-19, -1.0062854778587313e-18, -2.9044714873054812e-18, -9.7656345068593107e-18, -3.7125957267642694e-17, 1.5146567684423380e-16], [-1.2885682828692674e-21, -1.2424950106114169e-20, -3.9862225273590584e-20, -9.8648894106309505e-20, -2.3110733360808024e-19, -5.8004705781425367e-19, -1.6927812301924749e-18, -1.9998588352950404e-17], [-2.4309296225995422e-23, -2.2866406357890787e-22, -6.9377102820216361e-22, -1.5456163475094021e-21, -2.9279766582506756e-21, -3.7852135104953459e-21, 1.1360089866792165e-20, -2.5334084952918428e-19]],
        [[2.8161469586647497e-3, 2.6084769921865736e-2, 7.6967994570957560e-2, 1.6652589426834484e-1, 3.2015572100286075e-1, 6.0356192006882162e-1, 1.2462521477611121e+0, 3.9650934814573002e+0], [-1.1980165224241175e-4, -1.1325293334994678e-3, -3.4880296999066020e-3, -8.0951856915903499e-3, -1.7325592496701422e-2, -3.8511761540414792e-2, -1.0442423804959508e-1, -5.7972430725022228e-1], [1.9196542052485183e-6, 1.8489860756829476e-5, 5.9221859101396008e-5, 1.4649870301481634e-4, 3.4530892668013260e-4, 8.8778742122174269e-4, 3.0345206683467011e-3, 2.5562721114184080e-2], [-2.2272960341229866e-8, -2.1788080765225541e-7, -7.2075535963732229e-7, -1.8780814532921459e-6, -4.7812189807208453e-6, -1.3740176702394671e-5, -5.5041812669335589e-5, -5.2862065266026714e-4], [5.1039726390774128e-10, 4.9356721170271486e-9, 1.5936110393416507e-8, 3.9891562879269384e-8, 9.5288182511525355e-8, 2.4511012121789691e-7, 7.4193043119574612e-7, -4.6361488651025304e-6], [-8.4759686029738232e-12, -8.2876591735435001e-11, -2.7319439898040012e-10, -7.0197932601295393e-10, -1.7082413242373737e-9, -4.2207329023289170e-9, -7.2076100192182571e-9, 3.8991263319046148e-7], [-3.6991892406507933e-13, -3.5535833434076622e-12, -1.1328732738429460e-11, -2.7906542720783964e-11, -6.6159620299391847e-11, -1.7922621346615265e-10, -7.6102812004508230e-10, 4.3666809652042391e-9], [-1.9230907634557138e-15, -1.4816270471925316e-14, -2.1369806826331736e-14, 6.1611624774791165e-14, 6.1183153716683547e-13, 3.7532961386512516e-12, 2.5940812190985606e-11, -4.5484519071323194e-10], [7.8209117057589564e-16, 7.5466654730685490e-15, 2.4234619020581800e-14, 5.9976472021405322e-14, 1.4002699600467335e-13, 3.4626522400887829e-13, 1.1213994984298450e-12, -4.5685551346665259e-12], [1.7004041008585774e-17, 1.5889275498101156e-16, 4.7452290800219764e-16, 1.0224632830421860e-15, 1.7824515732530838e-15, 1.3902779148667329e-15, -2.5191676944744555e-14, 5.5322823340055182e-13], [-1.0578025170187568e-18, -1.0355926179024726e-17, -3.4302289162474768e-17, -8.9450475394842734e-17, -2.2686968891077892e-16, -6.3505932205208613e-16, -2.2061799558085587e-15, 4.8446552586308461e-15], [-5.0642291896559733e-20, -4.8287631457973785e-19, -1.5108559329534211e-18, -3.5705660193421305e-18, -7.6696426206974579e-18, -1.5621604880687249e-17, -9.8217215297100186e-18, -6.3449282350141532e-16], [8.5352996434782813e-22, 8.6094544707345660e-21, 3.0292580205021388e-20, 8.6719001163305817e-20, 2.5141725170826526e-19, 8.5753245886907426e-19, 4.0623220831686598e-18, -4.6820161993578609e-18], [1.0623795936532242e-22, 1.0256447341217484e-21, 3.2987745458555782e-21, 8.1947603002084557e-21, 1.9269621749897548e-20, 4.7675296124954493e-20, 1.2032169417072737e-19, 6.3673774735705610e-19]],
        [[2.5911421208208100e-3, 2.3960197151390920e-2, 7.0441050289206655e-2, 1.5144296388458695e-1, 2.8810159169055827e-1, 5.3316060574778421e-1, 1.0597203077144611e+0, 2.9895695637428009e+0], [-1.0539057992324626e-4, -9.9388087774685696e-4, -3.0450219421604944e-3, -7.0037775083649237e-3, -1.4769791837467219e-2, -3.2009989396968081e-2, -8.2604210182012356e-2, -4.0124957594547951e-1], [1.6943012753305244e-6, 1.6280281496865083e-5, 5.1877954311011242e-5, 1.2722149921665366e-4, 2.9571314835753302e-4, 7.4304251960355352e-4, 2.4380880630866464e-3, 1.9037963643189451e-2], [-1.5908885932124001e-8, -1.5642128756212787e-7, -5.2279938669333357e-7, -1.3838881690915249e-6, -3.6012124215449048e-6, -1.0670463077467009e-5, -4.5013021884035884e-5, -5.3910819727447206e-4], [2.6340977621423458e-10, 2.5420948063376307e-9, 8.1821874322016517e-9, 2.0451079056440980e-8, 4.9236962772825104e-8, 1.3216601183284359e-7, 4.8928650445976101e-7, 3.1717198515982078e-6], [-1.4981869812888870e-11, -1.4421199216870618e-10, -4.6071928678703524e-10, -1.1302589025777648e-9, -2.5980162284765305e-9, -6.1536076986535977e-9, -1.4098286607722702e-8, 3.4374910143001944e-7], [-5.7999974530873558e-14, -4.7101175189741483e-13, -9.1697232014889840e-13, 1.2203771093395303e-13, 8.6335197996370544e-12, 5.0572390813174463e-11, 2.2389445087650056e-10, -7.4701945447955210e-9], [2.1844687287234871e-14, 2.1116487177081432e-13, 6.8104731443268759e-13, 1.7005097251911441e-12, 4.0441955821381145e-12, 1.0386291607301909e-11, 3.3268731245440530e-11, -2.9879452165869109e-10], [3.3627961417369875e-16, 3.0519243613581395e-15, 8.4639536733437785e-15, 1.5235634408255648e-14, 1.3071690298392647e-14, -7.0474316545288569e-14, -9.0050639832992832e-13, 1.2353025561193413e-11], [-4.0921174992842454e-17, -3.9703108895569769e-16, -1.2899553668217398e-15, -3.2553359372747545e-15, -7.8322880873959698e-15, -2.0138725110063009e-14, -6.0409728901457934e-14, 2.3613024556054171e-13], [-8.6994181071770975e-19, -8.0675575332352704e-18, -2.3627255223015143e-17, -4.8594512087039839e-17, -7.3493378565359814e-17, 1.1890268916426299e-17, 1.5895927555264177e-15, -1.7052883012528739e-14], [7.1733923463394743e-20, 7.0045382237133356e-19, 2.3071209409120564e-18, 5.9579506477826600e-18, 1.4865521119213850e-17, 4.0397387463023655e-17, 1.2659877359397760e-16, -1.5497292529317084e-16], [2.0852625210901059e-21, 1.9606346647285570e-20, 5.9314560968336533e-20, 1.3054391603078756e-19, 2.3594224326539385e-19, 2.2488698656201584e-19, -2.4870305902645758e-18, 2.0178722842225537e-17], [-1.2111861303648348e-22, -1.1913943430042521e-21, -3.9860942932688451e-21, -1.0568284881227868e-20, -2.7496992519983779e-20, -8.0033791704133339e-20, -2.8337621694712548e-19, 1.1904088910053872e-19]],
        [[2.3933467317368174e-3, 2.2097080910360595e-2, 6.4747287901779893e-2, 1.3840343636600148e-1, 2.6079787535373123e-1, 4.7469924121474289e-1, 9.1238788349766777e-1, 2.3197950090011577e+0], [-9.2550355406541502e-5, -8.7066842255056330e-4, -2.6535427492321434e-3, -6.0485069424259043e-3, -1.2567245129035869e-2, -2.6550362958168219e-2, -6.5145314200340912e-2, -2.7351179370602526e-1], [1.5191295729671953e-6, 1.4555679779979186e-5, 4.6099696005564073e-5, 1.1187621896885318e-4, 2.5564717364873919e-4, 6.2407885685702078e-4, 1.9372243784484149e-3, 1.3062758096695190e-2], [-1.3955672922894202e-8, -1.3740505299376997e-7, -4.6033229092987941e-7, -1.2215848544927832e-6, -3.1817730453006599e-6, -9.3880366521168792e-6, -3.8909768715942016e-5, -4.4508899017171206e-4], [-4.2445079527671371e-13, 2.1910248774023557e-11, 2.6188219654937224e-10, 1.5516956617197182e-9, 7.6899048656831786e-9, 4.0903711340449732e-8, 3.1343714784440283e-7, 7.8230817848070282e-6], [-9.2495688040322289e-12, -8.7316282337759780e-11, -2.6737857336421230e-10, -6.0912450845309721e-10, -1.2333747533455128e-9, -2.2906286241728416e-9, -2.1681100164990644e-9, 1.1186807684332676e-7], [4.7472638513024672e-13, 4.6013249100247517e-12, 1.4909772768466187e-11, 3.7397430455892693e-11, 8.8730671931442451e-11, 2.1999519993202768e-10, 5.5794780081407602e-10, -9.9575487772984653e-9], [9.1658900618565472e-15, 8.4091097588145829e-14, 2.4031995228076717e-13, 4.7148200927008998e-13, 6.4170483419383441e-13, -2.9655314920726058e-13, -1.0924011689582363e-11, 1.0416675884920829e-10], [-9.3153578927801412e-16, -9.0201862110928441e-15, -2.9176696781714982e-14, -7.3035280212145476e-14, -1.7318269411293901e-13, -4.3269821290463082e-13, -1.1859917333510006e-12, 9.4171173854462226e-12], [-9.9661212848059382e-18, -8.7179216344818120e-17, -2.1767605152735366e-16, -2.7294091032898430e-16, 4.0161582353308443e-16, 5.6059973642589404e-15, 4.5378043828339624e-14, -3.1901055296036068e-13], [1.8623523899010016e-18, 1.7991785469565562e-17, 5.7893514460279229e-17, 1.4349434734559649e-16, 3.3358799453447277e-16, 7.9294370430528283e-16, 1.7368934395460291e-15, -5.6849208246504060e-15], [2.6258424180325133e-21, 7.6940734030601744e-21, -9.8504567212721655e-20, -7.7635917757753529e-19, -3.9298601095348730e-18, -1.9238436302571135e-17, -1.1544921285104245e-16, 4.9839830541703210e-16], [-3.5290019845591630e-21, -3.4041354297482663e-20, -1.0914572259787157e-19, -2.6854363756948407e-19, -6.1402269400090369e-19, -1.3885527123929260e-18, -2.1096737844059794e-18, -2.2360760268379982e-19], [2.4909554177627816e-23, 2.7553601639096339e-22, 1.1323646439569758e-21, 3.8854501473933165e-21, 1.3436273272386631e-20, 5.2857240168720102e-20, 2.6612631576542746e-19, -6.4184925752598411e-19]],
        [[2.2198620430801314e-3, 2.0466910391477099e-2, 5.9791371680912154e-2, 1.2715490164388142e-1, 2.3758836222589085e-1, 4.2624106436767339e-1, 7.9617700677302358e-1, 1.8619252863347808e+0], [-8.1077156947038622e-5, -7.6090460168437493e-4, -2.3070462209085510e-3, -5.2123165631677480e-3, -1.0673836575020580e-2, -2.1998964636413999e-2, -5.1429255389127804e-2, -1.8815352872551352e-1], [1.3476142245343189e-6, 1.2871516403213331e-5, 4.0489133156168671e-5, 9.7123397180498124e-5, 2.1775644665217418e-4, 5.1469988112093426e-4, 1.5009009262221246e-3, 8.5083502865141798e-3], [-1.4796178706774203e-8, -1.4480264815448176e-7, -4.7903817102394431e-7, -1.2454787399199635e-6, -3.1445707246938275e-6, -8.8400702721506280e-6, -3.3673231212070615e-5, -3.1354439763597014e-4], [-6.7761504369901679e-11, -5.9348567219440551e-10, -1.4850862268164446e-9, -1.8609423623567987e-9, 2.8792767896040504e-9, 4.0542423656981695e-8, 3.6438006982973561e-7, 8.0353678157082912e-6], [1.9949399800851045e-12, 2.0372688157341236e-11, 7.2769596628552318e-11, 2.0812519189609663e-10, 5.7507969359625548e-10, 1.6744393938510184e-9, 5.0010601690964745e-9, -6.9244795374757055e-8], [3.5134330027033232e-13, 3.3168235442608307e-12, 1.0148287682639665e-11, 2.3012713124450712e-11, 4.5757582214282013e-11, 7.8491111033345984e-11, 3.6813315630330572e-12, -4.6319385196961731e-9], [-1.4252029711354821e-14, -1.3882333064942687e-13, -4.5434568615773352e-13, -1.1571104377376411e-12, -2.8033963208262177e-12, -7.1486406637524932e-12, -1.9207892714345045e-11, 2.1648356721665093e-10], [-2.7733488622531074e-16, -2.5148870109043472e-15, -6.9701997436343795e-15, -1.2624964870620844e-14, -1.2037200108925880e-14, 4.2875111707366651e-14, 5.2444988298637969e-13, -1.6148732055789228e-12], [3.1362286907822103e-17, 3.0212687814305899e-16, 9.6606237631856727e-16, 2.3673904815847385e-15, 5.3951980662934909e-15, 1.2368477508342499e-14, 2.5204795640369972e-14, -2.0217583762291228e-13], [-1.9772088061818017e-19, -2.2064397030865861e-18, -9.1364081720973904e-18, -3.1198777549817710e-17, -1.0510458660584282e-16, -3.8994828726078986e-16, -1.7647135172267504e-15, 7.8221406844519323e-15], [-5.1635631408481352e-20, -4.9161488062099944e-19, -1.5310173229344830e-18, -3.5716384253530485e-18, -7.3960640845901415e-18, -1.3316118056216763e-17, 1.0843204733953936e-18, 3.1108478558917566e-17], [1.4914162898019409e-21, 1.4835060571633678e-20, 5.0658154169731475e-20, 1.3772161943029267e-19, 3.6550399159020956e-19, 1.0537203590316235e-18, 3.3452848702468683e-18, -1.0834296244186243e-17], [5.8872314604573300e-23, 5.4705110787947043e-22, 1.6071686891603567e-21, 3.3099763111225446e-21, 4.9439860774278540e-21, -1.2434679015104712e-21, -9.4451829394708967e-20, 2.4091935609376295e-19]],
        [[2.0679168224663995e-3, 1.9042490826056638e-2, 5.5482817355319309e-2, 1.1745986803730263e-1, 2.1786454152422666e-1, 3.8603450161217924e-1, 7.0412065505789543e-1, 1.5432248814296876e+0], [-7.1019586032094681e-5, -6.6499217450936058e-4, -2.0063563636653575e-3, -4.4951621357656290e-3, -9.0808082683229066e-3, -1.8291763131909088e-2, -4.0932364751651146e-2, -1.3308616144457125e-1], [1.1659682960481988e-6, 1.1100617536701485e-5, 3.4676900744320209e-5, 8.2203437716262791e-5, 1.8080030774390234e-4, 4.1377767664407190e-4, 1.1347157087018480e-3, 5.4571783090478891e-3], [-1.5244612552591410e-8, -1.4808269032968625e-7, -4.8233513270703222e-7, -1.2229033506799354e-6, -2.9723660642074904e-6, -7.8823046506174821e-6, -2.7180667908799232e-5, -2.0020721697976994e-4], [2.2905005836847954e-11, 2.8597681512218877e-10, 1.3644035222714974e-9, 5.2493208313164510e-9, 1.9401559598952882e-8, 7.8764333918715422e-8, 4.3343393818858386e-7, 5.9787390750716735e-6], [5.5411961658275723e-12, 5.2895520776013769e-11, 1.6569342485171109e-10, 3.9080837108381436e-10, 8.2822694487336344e-10, 1.6019004981324610e-9, 9.2593975451943433e-10, -1.1815085582396987e-7], [-3.1647034679975155e-14, -3.5767116131865582e-13, -1.4994735447239089e-12, -5.1184645624490192e-12, -1.6886631622252476e-11, -5.9652025126861817e-11, -2.4900525505049406e-10, 2.2038506512438961e-11], [-9.5604770924560468e-15, -9.0205703938273430e-14, -2.7556668464507790e-13, -6.2238684384111136e-13, -1.2240544756459862e-12, -2.0195084390120136e-12, 5.6458987210361168e-13, 1.0437868319220029e-10], [3.8611007641429836e-16, 3.7519242280604822e-15, 1.2215135533131905e-14, 3.0822155073838075e-14, 7.3484350813288774e-14, 1.8177260462408800e-13, 4.5422580955429039e-13, -3.9412940607499067e-12], [2.4771494684306139e-18, 1.9634084435691166e-17, 3.3933224064343697e-17, -3.6398492754244918e-17, -5.2845156738741965e-16, -3.0564013298358409e-15, -1.7315386029050207e-14, 3.7352638519600698e-14], [-7.0111745289387538e-19, -6.6780588760107640e-18, -2.0824074100289751e-17, -4.8761406494258579e-17, -1.0222909086290454e-16, -1.9495598365330649e-16, -1.4671069232312236e-16, 2.9122385062371241e-15], [1.8820294494863818e-20, 1.8627253386250629e-19, 6.2929383877461824e-19, 1.6799571460602664e-18, 4.3298391223219918e-18, 1.1903100161759708e-17, 3.5023677519121478e-17, -1.4726049652130955e-16], [5.1331282049607625e-22, 4.6569247745238396e-21, 1.2897480282409827e-20, 2.3134676153782878e-20, 1.9965148961179903e-20, -9.6288482932145606e-20, -1.0709942228597616e-18, 1.8998609222713455e-18], [-4.6681738709556029e-23, -4.4932860196618284e-22, -1.4324437968679472e-21, -3.4786633300715588e-21, -7.7201689306373103e-21, -1.6202653224129126e-20, -1.8236153515449967e-20, 1.0879097121807121e-19]],
        [[1.9346356672103822e-3, 1.7795788256336457e-2, 5.1729605015219860e-2, 1.0908205977999370e-1, 2.0104081786293969e-1, 3.5247804583838184e-1, 6.3038367702660646e-1, 1.3141341898005840e+0], [-6.2409547455366421e-5, -5.8314333589981220e-4, -1.7514928646478823e-3, -3.8942771661375023e-3, -7.7707261833115289e-3, -1.5336591980800386e-2, -3.3041998062652664e-2, -9.7587901733691488e-2], [9.8856624041091494e-7, 9.3827085451122153e-6, 2.9117569558497871e-5, 6.8257237217266317e-5, 1.4744851842716197e-4, 3.2752905846853171e-4, 8.4978650867990751e-4, 3.5529084234812803e-3], [-1.4099205275752407e-8, -1.3613120595317028e-7, -4.3780855862884697e-7, -1.0870980354448660e-6, -2.5587482630874185e-6, -6.4526046311231121e-6, -2.0394649540296145e-5, -1.2266394901226432e-4], [1.1145153858868439e-10, 1.1210099168417501e-9, 3.9100925214955150e-9, 1.0959064023408488e-8, 3.0361886318548118e-8, 9.4749056260944291e-8, 3.9955909460324562e-7, 3.7913840846421731e-6], [2.8980912077953512e-12, 2.6806408742650927e-11, 7.8075896246022431e-11, 1.5925286836214386e-10, 2.4046163786878849e-10, 1.6110626883091511e-11, -3.7770517639435558e-9, -9.5032446471859167e-8], [-1.4132385512520644e-13, -1.3640115362354058e-12, -4.3769198782005246e-12, -1.0775653319581466e-11, -2.4677305337622640e-11, -5.6862837082408323e-11, -1.1859383577599165e-10, 1.4780902467566416e-9], [5.6950211262561371e-16, 6.7770999708551481e-15, 3.0390447677207308e-14, 1.1001782310366956e-13, 3.8010702640222389e-13, 1.3949979582633691e-12, 6.0863484575045859e-12, 1.1672005437834206e-11], [1.8507619230129766e-16, 1.7384082484393768e-15, 5.2560619561307272e-15, 1.1635441432345516e-14, 2.1943982548545331e-14, 3.1884902884492325e-14, -4.1594230526425241e-14, -1.7373244948641193e-12], [-8.3311148528951314e-18, -8.0398313729432670e-17, -2.5794578022027147e-16, -6.3508461245061569e-16, -1.4554735710122261e-15, -3.3618032904059588e-15, -7.1278231734884680e-15, 6.0520389905528597e-14], [7.1277645274326582e-20, 7.5891491600502684e-19, 2.9155873156833866e-18, 9.1406261093679782e-18, 2.8083707141528848e-17, 9.3265127672691410e-17, 3.5618023302934605e-16, -8.2196382861757128e-16], [8.8789152727412758e-21, 8.2896866542122263e-20, 2.4697335611607961e-19, 5.2958971489653203e-19, 9.2252044756814310e-19, 9.3713238886407341e-19, -4.8553177375535855e-18, -2.5498799577894388e-17], [-4.4678299386686615e-22, -4.3098317342632096e-21, -1.3807402588490552e-20, -3.3849760488015211e-20, -7.6635541663853996e-20, -1.7037325250256664e-19, -2.9942446052897696e-19, 1.8475630410092410e-18], [5.0852188162489135e-24, 5.3205474734126110e-23, 1.9863744431827054e-22, 6.0273746674551930e-22, 1.7898053410369203e-21, 5.6963073274404011e-21, 1.9712859440527970e-20, -4.8687057716536771e-20]],
        [[1.7859267690711486e-3, 1.6408083287147678e-2, 4.7573114386310811e-2, 9.9883453894846196e-2, 1.8282116496359658e-1, 3.1694909757527232e-1, 5.5547076577769614e-1, 1.1037545757147794e+0], [-8.5203569216354008e-5, -7.9422217081680233e-4, -2.3733121134155311e-3, -5.2316190018651773e-3, -1.0297171732909712e-2, -1.9874014758191700e-2, -4.1128921206539378e-2, -1.1044537827795876e-1], [2.0229330432116954e-6, 1.9131713290196585e-5, 5.8921233495244346e-5, 1.3636271646236087e-4, 2.8861290128478499e-4, 6.2011278108052098e-4, 1.5152750926876610e-3, 5.4980523627247161e-3], [-4.6523971385872679e-8, -4.4659698508607962e-7, -1.4187385330969581e-6, -3.4516884578994561e-6, -7.8700625724999443e-6, -1.8870384894044830e-5, -5.4624203701107501e-5, -2.6905564602994297e-4], [9.0304397985665338e-10, 8.8420211633030918e-9, 2.9257367517074310e-8, 7.5910437910011571e-8, 1.8996925332773184e-7, 5.1995508676560901e-7, 1.8304300172053039e-6, 1.2608559934411062e-5], [-3.7210600328650669e-12, -4.3998836345738443e-11, -1.9651424770906800e-10, -7.1517834515641881e-10, -2.5215429084641981e-9, -9.7299887176347175e-9, -4.9339751481749218e-8, -5.3993536345716014e-7], [-1.0020787914359808e-12, -9.3889384011950306e-12, -2.8211234064834345e-11, -6.1590971619953438e-11, -1.1204063503375576e-10, -1.3764321380212000e-10, 4.9707712878188525e-10, 1.9418092446449355e-8], [6.4443449392515540e-14, 6.1997628293451001e-13, 1.9762789575512197e-12, 4.8153631628045393e-12, 1.0867421717983226e-11, 2.4564571582355258e-11, 5.0785201447045913e-11, -4.6949588651417718e-10], [-1.5108173389947616e-15, -1.5172585105547903e-14, -5.2681068962527913e-14, -1.4601950019309501e-13, -3.9422136284717703e-13, -1.1542995653595095e-12, -3.9831179649991415e-12, -2.1898890579755089e-12], [-8.5161383760625550e-17, -7.7338246418035680e-16, -2.1551632960794021e-15, -3.9868764806681428e-15, -4.3982528372709109e-15, 8.4919716867722583e-15, 1.2456905552888986e-13, 1.0366498487920952e-12], [1.0588924727783305e-17, 1.0051453776370960e-16, 3.1121189388466693e-16, 7.2054760832189620e-16, 1.4874886584757521e-15, 2.8011213789137593e-15, 2.5975366455252179e-15, -6.5790689251665037e-14], [-4.9185150239876678e-19, -4.7790344238068086e-18, -1.5547575662366282e-17, -3.9120822167916025e-17, -9.2535122813244252e-17, -2.2445605256568486e-16, -5.3975181208145270e-16, 2.3276801008040937e-15], [3.0845891292812501e-21, 3.7340196861883718e-20, 1.7065709991815988e-19, 6.2486486986395060e-19, 2.1585543359755983e-18, 7.7615149003780423e-18, 3.1067665746631955e-17, -2.0825330914281149e-17], [1.2129509735807329e-21, 1.1273581474900498e-20, 3.3242179984291649e-20, 6.9866608984693044e-20, 1.1655129517925264e-19, 9.7744762343125419e-20, -6.9381517094689711e-19, -3.4275256845781327e-18]],
        [[1.6301010773864076e-3, 1.4957340624084964e-2, 4.3249265853816381e-2, 9.0393597891190828e-2, 1.6427026437771641e-1, 2.8153478541199526e-1, 4.8356500781328744e-1, 9.1859433271586419e-1], [-7.1019185562124257e-5, -6.6032172999645552e-4, -1.9625431658869938e-3, -4.2871720521760118e-3, -8.3187301888464467e-3, -1.5692535487068032e-2, -3.1200054793358164e-2, -7.6623974713952166e-2], [1.5460530507290498e-6, 1.4566128629632489e-5, 4.4498626437003170e-5, 1.0159921101510883e-4, 2.1049421344510604e-4, 4.3705631535585452e-4, 1.0058562702723731e-3, 3.1935877270865044e-3], [-3.3477222993832775e-8, -3.1962203071603580e-7, -1.0037704775280703e-6, -2.3958389972675428e-6, -5.3014397670910644e-6, -1.2120419808137966e-5, -3.2305434260836025e-5, -1.3270008691408875e-4], [7.0165346325394638e-10, 6.7940276443891580e-9, 2.1969432023663506e-8, 5.4949901593310170e-8, 1.3028060978488368e-7, 3.2928015163721402e-7, 1.0213455943470597e-6, 5.4590689951504988e-6], [-1.2412225538268607e-11, -1.2274726440237730e-10, -4.1426246205425254e-10, -1.1068225488106038e-9, -2.8787461857029766e-9, -8.2588884127196785e-9, -3.0641189336728139e-8, -2.1883197293944906e-7], [3.7290228720020719e-14, 4.9571378157637913e-13, 2.5202478587619567e-12, 1.0089740838701952e-11, 3.7894412858533010e-11, 1.5219531950036354e-10, 7.8584855165169694e-10, 8.2918943351783024e-9], [1.3885064803206552e-14, 1.2907155879473487e-13, 3.8072926116114659e-13, 8.0052106649977674e-13, 1.3311116309895298e-12, 1.0006693662004299e-12, -1.1090279015613897e-11, -2.8112190372026781e-10], [-9.8835919938908636e-16, -9.4175866725304607e-15, -2.9411093552050259e-14, -6.9215591965328314e-14, -1.4751397246311351e-13, -2.9988270567618214e-13, -4.3684200729937563e-13, 7.5737800396757368e-12], [4.0692417966230348e-17, 3.9406496684990356e-16, 1.2739375939136017e-15, 3.1792179085562962e-15, 7.4660683525075452e-15, 1.8183234522365266e-14, 4.7182206571236481e-14, -9.6813852888658627e-14], [-6.9535437620065732e-19, -7.1049777040788849e-18, -2.5449420050506916e-17, -7.3405026636455064e-17, -2.0707784455609650e-16, -6.3520729489237459e-16, -2.3290277782125119e-15, -5.1931809859116051e-15], [-4.4509606823066731e-20, -4.0278427357177347e-19, -1.1132008162821380e-18, -2.0236271754604307e-18, -2.1056375350486980e-18, 4.8187543515327297e-18, 6.3051302943664769e-17, 4.9827197408171686e-16], [4.8032784198767704e-21, 4.5333676638057235e-20, 1.3861131275634218e-19, 3.1388606674110739e-19, 6.2314045105539190e-19, 1.0810923771298811e-18, 5.5909797038742174e-19, -2.4402060817779095e-17], [-2.3764007037206282e-22, -2.2841506044240512e-21, -7.2647150039827163e-21, -1.7617193268888206e-20, -3.9372329996992472e-20, -8.7188420213707296e-20, -1.7389275466759283e-19, 7.8580767616955437e-19]],
        [[1.4992817515205587e-3, 1.3742267201380458e-2, 3.9645849055858393e-2, 8.2550515340438995e-2, 1.4913765521387917e-1, 2.5324134210962936e-1, 4.2815337413211606e-1, 7.8671859091782910e-1], [-6.0084920314886749e-5, -5.5746483240868145e-4, -1.6493559056627264e-3, -3.5760055423520697e-3, -6.8578306298722487e-3, -1.2699574917589664e-2, -2.4466562563564440e-2, -5.6233840331747458e-2], [1.2038902264634947e-6, 1.1306175123569308e-5, 3.4306004792115400e-5, 7.7448965400626113e-5, 1.5766131410625356e-4, 3.1840695696340160e-4, 6.9901269789772532e-4, 2.0096204852026504e-3], [-2.4105139900879181e-8, -2.2914934677533890e-7, -7.1307850364561643e-7, -1.6763124354342353e-6, -3.6224311103872436e-6, -7.9787039386126050e-6, -1.9960912232099241e-5, -7.1788015536882792e-5], [4.8027859925632590e-10, 4.6220089136713117e-9, 1.4754032873852931e-8, 3.6128196785294316e-8, 8.2912937883985635e-8, 1.9928536524041473e-7, 5.6855129486817808e-7, 2.5600700109730980e-6], [-9.3056174878319431e-12, -9.0746576012755508e-11, -2.9771042780734585e-10, -7.6145261625695440e-10, -1.8623907244865132e-9, -4.9048624865087164e-9, -1.6029733510739368e-8, -9.0793227802715167e-8], [1.5672566606738594e-13, 1.5597081428280797e-12, 5.3300500704726946e-12, 1.4505740844784009e-11, 3.8646623232675763e-11, 1.1413600175994187e-10, 4.3691121070226677e-10, 3.1730479741288624e-9], [-8.6650468486045536e-16, -1.0121796478144603e-14, -4.4565612000292623e-14, -1.6056667328359207e-13, -5.6295584988735746e-13, -2.1613207775629675e-12, -1.0771916307595546e-11, -1.0726382464186933e-10], [-1.2533182583584772e-16, -1.1476598141313680e-15, -3.2621267668542153e-15, -6.3025268985780211e-15, -8.0348155576592482e-15, 8.2014494025271796e-15, 1.9177239819045314e-13, 3.3890978468327862e-12], [9.7528494554928287e-18, 9.2152985180196297e-17, 2.8252941153693927e-16, 6.4322428452999049e-16, 1.2901947745607488e-15, 2.2828291245683407e-15, 1.0802032378141188e-15, -9.3658989349686651e-14], [-4.7701281009364845e-19, -4.5619504782417176e-18, -1.4366402699533593e-17, -3.4347767787118470e-17, -7.5484498629543901e-17, -1.6491433944067529e-16, -3.3489490245168705e-16, 1.8984624854986613e-15], [1.6368233149474651e-20, 1.5864476728029093e-19, 5.1382745164833233e-19, 1.2866375045060817e-18, 3.0406301422295107e-18, 7.5105424930951697e-18, 2.0488420144487716e-17, -3.2701570678796979e-18], [-2.7637926727992543e-22, -2.8038066049490206e-21, -9.9110498775863734e-21, -2.8084237908935346e-20, -7.7572962008173566e-20, -2.3232541124117274e-19, -8.3124525795244455e-19, -2.2423100799061635e-18], [-1.0800878626595103e-23, -9.5533607773943045e-23, -2.4859493928631701e-22, -3.8245641018217767e-22, -7.8505369964898548e-23, 2.8035185994605276e-21, 2.1916959073962194e-20, 1.4458524802711069e-19]],
        [[1.3879107248061972e-3, 1.2709883672164102e-2, 3.6597049600046222e-2, 7.5960641951684036e-2, 1.3655987481157216e-1, 2.3012015469339447e-1, 3.8414898686979355e-1, 6.8801478938603224e-1], [-5.1493089110110798e-5, -4.7688281110367044e-4, -1.4055325503819999e-3, -3.0280929967330932e-3, -5.7503952363584146e-3, -1.0487677543986983e-2, -1.9699061366558613e-2, -4.3021783489752009e-2], [9.5522035189109098e-7, 8.9464134912761965e-6, 2.6990003612826977e-5, 6.0355518906641755e-5, 1.2107081634226217e-4, 2.3898529129578787e-4, 5.0507809376752504e-4, 1.3450739674961752e-3], [-1.7718507020880490e-8, -1.6782456280797729e-7, -5.1824472984975103e-7, -1.2029171121311457e-6, -2.5489047777126413e-6, -5.4454943852221797e-6, -1.2949363875339261e-5, -4.2051797767510170e-5], [3.2846847341076768e-10, 3.1463752099126525e-9, 9.9454890406956422e-9, 2.3962387861061802e-8, 5.3637119167748648e-8, 1.2403066254692154e-7, 3.3189320518288004e-7, 1.3143946651201289e-6], [-6.0657431333984645e-12, -5.8768201982919731e-11, -1.9019499868233703e-10, -4.7583849778205324e-10, -1.1256662733480220e-9, -2.8189532977854579e-9, -8.4933517134209196e-9, -4.1047016203752936e-8], [1.0971191855316025e-13, 1.0760659159159803e-12, 3.5717597851130656e-12, 9.3015786389186474e-12, 2.3324837367298986e-11, 6.3467894248476182e-11, 2.1604285745557570e-10, 1.2781611332545351e-9], [-1.7958337515716407e-15, -1.7932930600743885e-14, -6.1707172889946273e-14, -1.6971432676379977e-13, -4.5868381063325013e-13, -1.3792878475153123e-12, -5.3865485870146820e-12, -3.9488287519588897e-11], [1.6081642563749651e-17, 1.7392946676895052e-16, 6.8759813175339513e-16, 2.2437333942877541e-15, 7.2868042169292272e-15, 2.6475482222913169e-14, 1.2659376438147319e-13, 1.1974994913674791e-12], [7.5626677026810774e-19, 6.6980025380080208e-18, 1.7388913229022636e-17, 2.5741625720744911e-17, -5.4604610108842673e-18, -2.8972181897826811e-16, -2.4998250709727019e-15, -3.4919967514286009e-14], [-6.8735970859233695e-20, -6.4347943273976943e-19, -1.9314399577828488e-18, -4.2200628412213905e-18, -7.7590071044592442e-18, -1.0387807715819483e-17, 2.2450978399169995e-17, 9.4241252708887948e-16], [3.6401646610899527e-21, 3.4526264050003283e-20, 1.0680708046039933e-19, 2.4760490620127445e-19, 5.1630412103947588e-19, 1.0175179704748304e-18, 1.4182186260795303e-18, -2.1718311852268925e-17], [-1.4864954628027788e-22, -1.4218903371510234e-21, -4.4807644523477982e-21, -1.0734080595895968e-20, -2.3725364754530515e-20, -5.2779047486482912e-20, -1.1681593666147598e-19, 3.2848954978324279e-19], [4.6232509022555886e-24, 4.4713868710134758e-23, 1.4419279685524846e-22, 3.5866158609556926e-22, 8.4005797441998140e-22, 2.0542961571946047e-21, 5.5984335776137943e-21, 3.3893155288988047e-21]],
        [[1.2919505308150827e-3, 1.1821862498761228e-2, 3.3983947583990763e-2, 7.0345758350580306e-2, 1.2594007525650010e-1, 2.1087104524920787e-1, 3.4835564168302498e-1, 6.1135092497812881e-1], [-4.4620841601110801e-5, -4.1259227512738543e-4, -1.2120446530988512e-3, -2.5971229851911097e-3, -4.8911200507512632e-3, -8.8072483871579585e-3, -1.6201035322980761e-2, -3.3975320337448762e-2], [7.7054749940814908e-7, 7.1998934043723780e-6, 2.1613903095289835e-5, 4.7942083143851814e-5, 9.4977882077758275e-5, 1.8392184815179420e-4, 3.7673196581477184e-4, 9.4407462934668135e-4], [-1.3306331588704064e-8, -1.2564011801162341e-7, -3.8542965742153187e-7, -8.8499072407294815e-7, -1.8443111442262534e-6, -3.8408213782211485e-6, -8.7603226157837939e-6, -2.6232961855168101e-5], [2.2976914040141740e-10, 2.1923280540082587e-9, 6.8727889642004757e-9, 1.6335710130473649e-8, 3.5811741928193338e-8, 8.0204193093354354e-8, 2.0370100405784198e-7, 7.2891666848228656e-7], [-3.9658421581987986e-12, -3.8238314192139262e-11, -1.2250335723307158e-10, -3.0142602982310732e-10, -6.9515440497535481e-10, -1.6744030600599120e-9, -4.7357108313945152e-9, -2.0251599812382859e-8], [6.8268947716790642e-14, 6.6524498568329530e-13, 2.1784189860014884e-12, 5.5504589278844416e-12, 1.3471013209944340e-11, 3.4911195308194444e-11, 1.1000339626593045e-10, 5.6240721652791413e-10], [-1.1591368276913882e-15, -1.1423111343217272e-14, -3.8284374404454010e-14, -1.0119318347365958e-13, -2.5901827744655993e-13, -7.2389963837087794e-13, -2.5467951077440285e-12, -1.5596339886034514e-11], [1.8467481873452288e-17, 1.8478371399791643e-16, 6.3853050925167341e-16, 1.7681906659008592e-15, 4.8263757960918553e-15, 1.4706047861725499e-14, 5.8318390788327620e-14, 4.3077967783552639e-13], [-2.1386825487497737e-19, -2.2367822409252178e-18, -8.3813940746934116e-18, -2.5825510063508827e-17, -7.9754381985714804e-17, -2.7861234043323963e-16, -1.2925389000922900e-15, -1.1781913280588971e-14], [-2.5104432276843394e-21, -1.9377977226889157e-20, -2.8732041489344543e-20, 7.0852365914979800e-20, 7.1113940412713990e-19, 4.0910825796121314e-18, 2.6133807537242797e-17, 3.1535696412777192e-16], [3.6295511108074550e-22, 3.3520722099319245e-21, 9.7373609256191319e-21, 1.9819038108465826e-20, 3.0156813145269491e-20, 6.4221941870530148e-21, -3.9454351589644598e-19, -8.0805531041334555e-18], [-2.0558829166428329e-23, -1.9353404470001534e-22, -5.8873082417859579e-22, -1.3231720814176232e-21, -2.5994586504973497e-21, -4.4124152772911107e-21, -1.0301356694653704e-21, 1.9006420279850799e-19], [8.9994646925126578e-25, 8.5407286249916952e-24, 2.6464018381464434e-23, 6.1604024366198276e-23, 1.2985410801260946e-22, 2.6463859093543508e-22, 4.5084518639439055e-22, -3.7307574912924654e-21]],
        [[1.2084080625057994e-3, 1.1049888631139995e-2, 3.1719330616784514e-2, 6.5504280783091058e-2, 1.1685381880946175e-1, 1.9459586101867670e-1, 3.1866942167381264e-1, 5.5007829914518836e-1], [-3.9038168252221686e-5, -3.6048052104258829e-4, -1.0559340559050619e-3, -2.2520380583083436e-3, -4.2110367218030003e-3, -7.5006975203258511e-3, -1.3558641417866059e-2, -2.7510296333848007e-2], [6.3057280673609115e-7, 5.8799778827241368e-6, 1.7575980794511626e-5, 3.8712548081198856e-5, 7.5876123825531844e-5, 1.4455718898536200e-4, 2.8844429070338542e-4, 6.8791695527537127e-4], [-1.0185464392317795e-8, -9.5911211142030650e-8, -2.9255137118458953e-7, -6.6546863679200356e-7, -1.3671653892185518e-6, -2.7859772082555534e-6, -6.1363137509564887e-6, -1.7201907942202424e-5], [1.6452210119632899e-10, 1.5644472140181606e-9, 4.8694806506778946e-9, 1.1439353683953396e-8, 2.4634015023104370e-8, 5.3692529551550186e-8, 1.3054248455632260e-7, 4.3014637836986712e-7], [-2.6573548019155063e-12, -2.5517307197017061e-11, -8.1048790753153779e-11, -1.9663473921949691e-10, -4.4384990427711919e-10, -1.0347591508075523e-9, -2.7770773683382474e-9, -1.0755998514138838e-8], [4.2909244401200499e-14, 4.1609202376333117e-13, 1.3486523770323303e-12, 3.3792590625332102e-12, 7.9956853328870855e-12, 1.9938929588541611e-11, 5.9071908912421425e-11, 2.6894400623953718e-10], [-6.9172603978841637e-16, -6.7742158634248969e-15, -2.2409510712869126e-14, -5.8003074414982014e-14, -1.4389687583214746e-13, -3.8393485881051946e-13, -1.2559799303519083e-12, -6.7233256706570086e-12], [1.1059054577523139e-17, 1.0942812041242364e-16, 3.6977978169276367e-16, 9.8986338498048454e-16, 2.5783395832651016e-15, 7.3708976877786791e-15, 2.6659463084271087e-14, 1.6796328235476678e-13], [-1.7034985371970033e-19, -1.7072981257646215e-18, -5.9204162286170528e-18, -1.6490044146088093e-17, -4.5399341500757808e-17, -1.3995604782827375e-16, -5.6267618064952297e-16, -4.1879777973073615e-15], [2.2219583456758580e-21, 2.2880139624148186e-20, 8.3506442637673822e-20, 2.4965194299367153e-19, 7.4963647987627961e-19, 2.5606116904370914e-18, 1.1675543698030614e-17, 1.0390893641825397e-16], [-5.8604354692381700e-24, -9.1218822439746666e-23, -5.3456350037237370e-22, -2.3613797367944680e-21, -9.5818234972511942e-21, -4.1436257417777557e-20, -2.3108157845351559e-19, -2.5491767893094540e-18], [-1.4196968839985092e-24, -1.2749506904700184e-23, -3.4401099499120725e-23, -5.7521415478377700e-23, -2.8189022664105106e-23, 3.8964413226635864e-22, 4.0070487768698495e-21, 6.1078111908576752e-20], [9.0659474156101047e-26, 8.4563986969268761e-25, 2.5178743198500359e-24, 5.4190848483623888e-24, 9.6478677038549571e-24, 1.1327997690249339e-23, -4.2514824660909613e-23, -1.3962729716317399e-21]],
        [[1.1350183970160024e-3, 1.0372599632521879e-2, 2.9737813732712363e-2, 6.1286633073716681e-2, 1.0899112595305494e-1, 1.8065442487327527e-1, 2.9364907753901544e-1, 4.9998044479042626e-1], [-3.4441443735776559e-5, -3.1765446125592306e-4, -9.2815691456879923e-4, -1.9714414221138384e-3, -3.6635643115158161e-3, -6.4647828441799876e-3, -1.1513896361272534e-2, -2.2730001915102297e-2], [5.2255234238340914e-7, 4.8639858912181844e-6, 1.4484508913877780e-5, 3.1708229653098032e-5, 6.1572459766196226e-5, 1.1567227639182070e-4, 2.2572829146459030e-4, 5.1667319321930339e-4], [-7.9282664105302301e-9, -7.4478280206860967e-8, -2.2604043392607398e-7, -5.0998816652151612e-7, -1.0348303906955225e-6, -2.0696867117324906e-6, -4.4253707558318819e-6, -1.1744441709072218e-5], [1.2028916408253818e-10, 1.1404252152973837e-9, 3.5275106481645021e-9, 8.2025343176800053e-9, 1.7392087438719108e-8, 3.7032226175324294e-8, 8.6758738371821611e-8, 2.6696157007002401e-7], [-1.8250437182847538e-12, -1.7462343058071140e-11, -5.5048963510693132e-11, -1.3192732025942958e-10, -2.9230290108030541e-10, -6.6260406247904769e-10, -1.7008894036311567e-9, -6.0682665382189213e-9], [2.7689086235035235e-14, 2.6737894532861637e-13, 8.5905253765090542e-13, 2.1218384729025527e-12, 4.9125485750149173e-12, 1.1855567096337309e-11, 3.3345303547194035e-11, 1.3793616116284868e-10], [-4.2002055333070628e-16, -4.0933762000285761e-15, -1.3403747534091546e-14, -3.4122004735772239e-14, -8.2553564067209289e-14, -2.1210820863091493e-13, -6.5369015665629997e-13, -3.1353144583160820e-12], [6.3653713292563310e-18, 6.2610715685653459e-17, 2.0897089825345766e-16, 5.4835980246185775e-16, 1.3865616949150994e-15, 3.7934608272096323e-15, 1.2811988111736326e-14, 7.1259764967388264e-14], [-9.6023349842202185e-20, -9.5353547216875073e-19, -3.2455942663966395e-18, -8.7851988730799340e-18, -2.3235079378660639e-17, -6.7742280789628866e-17, -2.5090399539998103e-16, -1.6191091938882228e-15], [1.4194928428380293e-21, 1.4250974793700202e-20, 4.9597511729433368e-20, 1.3895728621424333e-19, 3.8584118082364087e-19, 1.2029871666248571e-18, 4.9000546747042627e-18, 3.6755382381033227e-17], [-1.9277892630400457e-23, -1.9706900721051114e-22, -7.1028945339233263e-22, -2.0927712790841551e-21, -6.2004073239440171e-21, -2.0966296970666401e-20, -9.4895169365663527e-20, -8.3242622607591793e-19], [1.6981846741057794e-25, 1.8683322092082496e-24, 7.6154584695987431e-24, 2.5894819852301154e-23, 8.8611532947917724e-23, 3.4429902151833883e-22, 1.7950601626045403e-21, 1.8747322957924703e-20], [3.4170214449742074e-27, 2.7597340866629330e-26, 5.1172632147583694e-26, -3.4624711025564408e-26, -7.1810884401345575e-25, -4.6222891716394096e-24, -3.1882249949976609e-23, -4.1690613286995512e-22]],
        [[1.0700360575559626e-3, 9.7735752047336024e-3, 2.7989412789329925e-2, 5.7579489629952769e-2, 1.0212032388080746e-1, 1.6857809325175182e-1, 2.7227406135932645e-1, 4.5825336958361048e-1], [-3.0611420917487787e-5, -2.8203179167265646e-4, -8.2224828044516875e-4, -1.7402079606546650e-3, -3.2163320925645554e-3, -5.6295926614511561e-3, -9.8992201450100166e-3, -1.9095922679440453e-2], [4.3786332425604643e-7, 4.0692341255852463e-6, 1.2077642351758472e-5, 2.6296896389748639e-5, 5.0650016251606366e-5, 9.3998908513444777e-5, 1.7995573830607827e-4, 3.9787406611355688e-4], [-6.2631620678669440e-9, -5.8712055959428792e-8, -1.7740316149428014e-7, -3.9738167737255455e-7, -7.9762414689641834e-7, -1.5695264857281011e-6, -3.2713756459337876e-6, -8.2899252848003882e-6], [8.9587768390661814e-11, 8.4711405671793297e-10, 2.6057967294521218e-9, 6.0049745612738427e-9, 1.2560790957446018e-8, 2.6206829221276336e-8, 5.9469614828778878e-8, 1.7272515657933661e-7], [-1.2814559317781188e-12, -1.2222396807831258e-11, -3.8275388799992515e-11, -9.0743266835395201e-11, -1.9780424080677844e-10, -4.3758279421760187e-10, -1.0810848453518236e-9, -3.5988234037469201e-9], [1.8329799202252607e-14, 1.7634777125746420e-13, 5.6220907601212366e-13, 1.3712508210580107e-12, 3.1149678710757440e-12, 7.3064343715537547e-12, 1.9652783381994404e-11, 7.4983422717503229e-11], [-2.6218340646269932e-16, -2.5443526415722602e-15, -8.2579138411480613e-15, -2.0721175271666112e-14, -4.9053211491068623e-14, -1.2199657856099367e-13, -3.5726157386626918e-13, -1.5623161481194697e-12], [3.7498391818191563e-18, 3.6706802114822322e-17, 1.2128540192311377e-16, 3.1309979735486846e-16, 7.7242877820527329e-16, 2.0369179513798536e-15, 6.4943935046849150e-15, 3.2551278646795224e-14], [-5.3604857425720963e-20, -5.2931258059746704e-19, -1.7806003418963793e-18, -4.7293619462774391e-18, -1.2160099221918536e-17, -3.4003520339875287e-17, -1.1804520768710268e-16, -6.7818813020496372e-16], [7.6446700400893850e-22, 7.6156784691564906e-21, 2.6090417860079989e-20, 7.1325689608854777e-20, 1.9121624922610061e-19, 5.6723398403784852e-19, 2.1448467136051730e-18, 1.4127831630895915e-17], [-1.0789821547592183e-23, -1.0852683759052454e-22, -3.7917163104094560e-22, -1.0688484615659869e-21, -2.9935118803035595e-21, -9.4371812762380044e-21, -3.8921611567529345e-20, -2.9419163215997461e-19], [1.4603967554840496e-25, 1.4883382351597314e-24, 5.3368384639464800e-24, 1.5635936666169226e-23, 4.6119962328772216e-23, 1.5560028762222606e-22, 7.0351101420849683e-22, 6.1195833859022710e-21], [-1.6587178397580558e-27, -1.7450613951523596e-26, -6.6293503892058169e-26, -2.0937699627343214e-25, -6.7275452590633902e-25, -2.4935998019842163e-24, -1.2570710728280328e-23, -1.2690686757705868e-22]],
        [[1.0120941297888798e-3, 9.2399857083485765e-3, 2.6435260787794252e-2, 5.4295417171760213e-2, 9.6064778899919134e-2, 1.5801588620894316e-1, 2.5380138512147822e-1, 4.2295941648780806e-1], [-2.7386582227170524e-5, -2.5208287763797843e-4, -7.3348749291945904e-4, -1.5474009725910485e-3, -2.8462777898003387e-3, -4.9464189067220351e-3, -8.6019166131483599e-3, -1.6268766413077275e-2], [3.7053119072879622e-7, 3.4386296258232860e-6, 1.0175876579854095e-5, 2.2050201422940705e-5, 4.2165803895186086e-5, 7.7419620860973167e-5, 1.4576943578075319e-4, 3.1288198144315549e-4], [-5.0131616332355331e-9, -4.6905897826136141e-8, -1.4117277411826969e-7, -3.1421163056626408e-7, -6.2465969565802197e-7, -1.2117448616201272e-6, -2.4702318519729038e-6, -6.0173667638880325e-6], [6.7826380476860055e-11, 6.3983722786075428e-10, 1.9585292692586688e-9, 4.4774624388759022e-9, 9.2539379974341778e-9, 1.8965807266536319e-8, 4.1860938567277575e-8, 1.1572639170464903e-7], [-9.1766796002756353e-13, -8.7279359363457893e-12, -2.7171222362225465e-11, -6.3803079339217671e-11, -1.3709123210883056e-10, -2.9684618652391752e-10, -7.0938206088888135e-10, -2.2256575308063679e-9], [1.2415734824618811e-14, 1.1905661461368772e-13, 3.7695388692265926e-13, 9.0918292944810538e-13, 2.0309195799757233e-12, 4.6461323501842740e-12, 1.2021299400727534e-11, 4.2803989431781001e-11], [-1.6798046147085745e-16, -1.6240336024246243e-15, -5.2295800684305318e-15, -1.2955688690690799e-14, -3.0086761302712801e-14, -7.2719590548124976e-14, -2.0371473922170379e-13, -8.2320891173536007e-13], [2.2726975998127408e-18, 2.2153033071649414e-17, 7.2550835968642009e-17, 1.8461508340729804e-16, 4.4571383888270091e-16, 1.1381769736359451e-15, 3.4521730676513229e-15, 1.5831987239904975e-14], [-3.0747100723541687e-20, -3.0217054030909064e-19, -1.0064700634495260e-18, -2.6306287245270100e-18, -6.6027647030940978e-18, -1.7813965744783787e-17, -5.8500322750150728e-17, -3.0448010808324953e-16], [4.1587203339044804e-22, 4.1206970680690439e-21, 1.3959547017833975e-20, 3.7478355026796857e-20, 9.7800874518550048e-20, 2.7878987135330775e-19, 9.9130057487002135e-19, 5.8556540374138891e-18], [-5.6183570963903145e-24, -5.6133019975279078e-23, -1.9343532591382229e-22, -5.3355649381705327e-22, -1.4478752116808918e-21, -4.3616619581848932e-21, -1.6795065755632405e-20, -1.1260775029965977e-19], [7.5523632103142279e-26, 7.6112855644517465e-25, 2.6699177507401176e-24, 7.5730267966246590e-24, 2.1390536890598623e-23, 6.8155454991317284e-23, 2.8438984094396551e-22, 2.1651547165329690e-21], [-9.9522484902780252e-28, -1.0133844534787437e-26, -3.6295462075614995e-26, -1.0626493100478617e-25, -3.1362216162481494e-25, -1.0603858708955563e-24, -4.8057274493598452e-24, -4.1595768348780285e-23]],
        [[9.6010687962274449e-4, 8.7616612610482385e-3, 2.5044678932569431e-2, 5.1365877043109088e-2, 9.0687462108578092e-2, 1.4869972591391688e-1, 2.3767722384265380e-1, 3.9271647586738606e-1], [-2.4645812734677228e-5, -2.2666361713658244e-4, -6.5836238956542370e-4, -1.3849534949384585e-3, -2.5366104388949883e-3, -4.3804819983154881e-3, -7.5439312921070952e-3, -1.4026122083533053e-2], [3.1632732680305877e-7, 2.9318866481306790e-6, 8.6533558118503540e-6, 1.8670918258943039e-5, 3.5475645525316062e-5, 6.4521378299876951e-5, 1.1972308162285181e-4, 2.5047599577734695e-4], [-4.0600396813430446e-9, -3.7923860150230929e-8, -1.1373761319423367e-7, -2.5170750491194601e-7, -4.9614296548382204e-7, -9.5035392436123079e-7, -1.9000194617619310e-6, -4.4729558239066477e-6], [5.2110332607582990e-11, 4.9054391972551114e-10, 1.4949396436787663e-9, 3.3933343365900675e-9, 6.9387840174574413e-9, 1.3998036081745317e-8, 3.0153533520192614e-8, 7.9877250271276329e-8], [-6.6883256684971556e-13, -6.3451699266952224e-12, -1.9649124623427124e-11, -4.5746422671417503e-11, -9.7042036168160950e-11, -2.0618109630898188e-10, -4.7854014210418036e-10, -1.4264337407941715e-9], [8.5844203150817553e-15, 8.2074569425032373e-14, 2.5826333288309935e-13, 6.1671941571912145e-13, 1.3571768036632240e-12, 3.0369006030798886e-12, 7.5944886000580807e-12, 2.5473000186472131e-11], [-1.1018043901321443e-16, -1.0616318348128457e-15, -3.3945504092173377e-15, -8.3141541985938613e-15, -1.8980730881899849e-14, -4.4731379524011109e-14, -1.2052542778860381e-13, -4.5489230154400101e-13], [1.4141574153431137e-18, 1.3732164488885233e-17, 4.4617120681334085e-17, 1.1208521455131136e-16, 2.6545399926146494e-16, 6.5886112965301160e-16, 1.9127523806252894e-15, 8.1233849911716792e-15], [-1.8150529605451047e-20, -1.7762432435314097e-19, -5.8643430054400965e-19, -1.5110448590527509e-18, -3.7124846135600223e-18, -9.7045368337550669e-18, -3.0355571832501092e-17, -1.4506588929693830e-16], [2.3295449879665530e-22, 2.2975062868218566e-21, 7.7077761658272186e-21, 2.0370408913483181e-20, 5.1920045583995220e-20, 1.4293954923920327e-19, 4.8174389611012498e-19, 2.5905550498123192e-18], [-2.9895291723874759e-24, -2.9714209733178663e-23, -1.0129737060017808e-22, -2.7459308594309465e-22, -7.2607567741458291e-22, -2.1053050289180126e-21, -7.6451537015219965e-21, -4.6261270376428503e-20], [3.8344300687033717e-26, 3.8410994034232007e-25, 1.3307065417906678e-24, 3.7002832240646489e-24, 1.0151440499882448e-23, 3.1003917342440751e-23, 1.2131837711727518e-22, 8.2610029819620839e-22], [-4.9076810970410774e-28, -4.9549304316058580e-27, -1.7449300357248384e-26, -4.9791294442136065e-26, -1.4178104076644844e-25, -4.5625770779324028e-25, -1.9242411340571765e-24, -1.4746240460946451e-23]],
        [[9.1320096911291738e-4, 8.3304362492220026e-3, 2.3793127597443956e-2, 4.8736381264047756e-2, 8.5880434706445289e-2, 1.4042131553584789e-1, 2.2348029248099899e-1, 3.6651209847010935e-1], [-2.2296850771761634e-5, -2.0490443740890073e-4, -5.9421615304304615e-4, -1.2468097973030932e-3, -2.2748696257384390e-3, -3.9064101144839546e-3, -6.6698140850655914e-3, -1.2217261305662530e-2], [2.7220161341984247e-7, 2.5200257953944856e-6, 7.4200593236679687e-6, 1.5948400664266367e-5, 3.0129282832559309e-5, 5.4336622343659071e-5, 9.9530968559836293e-5, 2.0362421108864089e-4], [-3.3230575522431946e-9, -3.0992642666779868e-8, -9.2655307474865143e-8, -2.0400183275594171e-7, -3.9904426773882412e-7, -7.5580096333706018e-7, -1.4852608447719756e-6, -3.3937900077691084e-6], [4.0568133879626631e-11, 3.8116431237391788e-10, 1.1569996449809774e-9, 2.6094621425484337e-9, 5.2851018226849553e-9, 1.0512892990775336e-8, 2.2163953681202696e-8, 5.6564052748072860e-8], [-4.9525879720742132e-13, -4.6877652409597243e-12, -1.4447614657939373e-11, -3.3378585775637319e-11, -6.9998001557782402e-11, -1.4623019074084512e-10, -3.3074381816162145e-10, -9.4274897854132216e-10], [6.0461562462735473e-15, 5.7652676883528801e-14, 1.8040936320831240e-13, 4.2695771271294208e-13, 9.2708151786117096e-13, 2.0340042169865039e-12, 4.9355577436183921e-12, 1.5712729077806039e-11], [-7.3811924905934354e-17, -7.0904385414593968e-16, -2.2527966684952617e-15, -5.4613724156324861e-15, -1.2278638223688656e-14, -2.8292195486029144e-14, -7.3651354466680748e-14, -2.6188291940597831e-13], [9.0110142685181091e-19, 8.7202050843594948e-18, 2.8130982479586424e-17, 6.9858411697599626e-17, 1.6262318862238789e-16, 3.9353325940745919e-16, 1.0990696945515379e-15, 4.3647836510249379e-15], [-1.1000709430603306e-20, -1.0724577136929964e-19, -3.5127536515568930e-19, -8.9358429571021322e-19, -2.1538460913320395e-18, -5.4738914604825290e-18, -1.6400976065247644e-17, -7.2747530391296209e-17], [1.3429718563118243e-22, 1.3189638799642781e-21, 4.3864160203689561e-21, 1.1430146434079270e-20, 2.8526365262346187e-20, 7.6139607394335735e-20, 2.4474509140170619e-19, 1.2124775802339652e-18], [-1.6394897276131183e-24, -1.6221143831418194e-23, -5.4773224849688074e-23, -1.4620597530879120e-22, -3.7781226066060485e-22, -1.0590675898850122e-21, -3.6522250124042950e-21, -2.0208258569008929e-20], [2.0013799117610150e-26, 1.9948515595152406e-25, 6.8392752916383307e-25, 1.8701013283958208e-24, 5.0037563856888336e-24, 1.4730949519242892e-23, 5.4500190680407427e-23, 3.3680845488743539e-22], [-2.4432765476427255e-28, -2.4529805932870849e-27, -8.5391586931826923e-27, -2.3916896226518820e-26, -6.6259554699529908e-26, -2.0485861231035437e-25, -8.1309409241011861e-25, -5.6119706792385720e-24]],
        [[8.7066592739036428e-4, 7.9396786352414200e-3, 2.2660743433575185e-2, 4.6363066507641215e-2, 8.1557515253945036e-2, 1.3301634989752545e-1, 2.1088442059465578e-1, 3.4358759811659127e-1], [-2.0268414930628243e-5, -1.8613486952716381e-4, -5.3900896078453530e-4, -1.1283522654255246e-3, -2.0516510232982420e-3, -3.5053423536264324e-3, -5.9392943913558640e-3, -1.0737095298031285e-2], [2.3591634338524366e-7, 2.1818382862570856e-6, 6.4104397249289076e-6, 1.3730528746206603e-5, 2.5805542924489187e-5, 4.6187649208512356e-5, 8.3636377139006972e-5, 1.6776684617103838e-4], [-2.7459730455862653e-9, -2.5575102179779744e-8, -7.6239432841957731e-8, -1.6708205888105844e-7, -3.2458056368528966e-7, -6.0858504653663036e-7, -1.1777566693981039e-6, -2.6213527861056831e-6], [3.1962041539323442e-11, 2.9978658621308325e-10, 9.0671644527887203e-10, 2.0331638290069322e-9, 4.0825547685826673e-9, 8.0189350446452421e-9, 1.6585017426161888e-8, 4.0958571887425137e-8], [-3.7202553790544896e-13, -3.5140425497131014e-12, -1.0783589036409687e-11, -2.4740867949879479e-11, -5.1350127836348306e-11, -1.0566036680663473e-10, -2.3354807505878914e-10, -6.3997666393744800e-10], [4.3302303039228947e-15, 4.1190952526413300e-14, 1.2824934753062181e-13, 3.0106307133828015e-13, 6.4587881319572639e-13, 1.3922189232494608e-12, 3.2887938529799297e-12, 9.9996194082524122e-12], [-5.0402170195447313e-17, -4.8283267645919584e-16, -1.5252709539843412e-15, -3.6635324630558900e-15, -8.1238247851384593e-15, -1.8344376311295887e-14, -4.6312370603824053e-14, -1.5624380377641695e-13], [5.8666134936889700e-19, 5.6596747227531805e-18, 1.8140064819249887e-17, 4.4580260271626539e-17, 1.0218097833853960e-16, 2.4171208720712174e-16, 6.5216482541320339e-16, 2.4413055346884174e-15], [-6.8285061997969752e-21, -6.6341651864425665e-20, -2.1573999351545996e-19, -5.4248177008005743e-19, -1.2852261689896158e-18, -3.1848851980145463e-18, -9.1837008460436367e-18, -3.8145337946415517e-17], [7.9481101934177123e-23, 7.7764437287233010e-22, 2.5657978554298870e-21, 6.6012724146603814e-21, 1.6165495857699715e-20, 4.1965188068041121e-20, 1.2932368526620277e-19, 5.9601994358064495e-19], [-9.2512769028299964e-25, -9.1153937559695295e-24, -3.0515037756939491e-23, -8.0328547311027485e-23, -2.0332852766878475e-22, -5.5294819206903664e-22, -1.8211190919519677e-21, -9.3127960062634004e-21], [1.0768170141908494e-26, 1.0684915646081219e-25, 3.6291561440174715e-25, 9.7748994404500920e-25, 2.5574522884994830e-24, 7.2858409416556106e-24, 2.5644756185636392e-23, 1.4551217118474680e-22], [-1.2537671874193290e-28, -1.2531935904553207e-27, -4.3176752099065397e-27, -1.1897233915694447e-26, -3.2169663194101588e-26, -9.5995948257873527e-26, -3.6107363827485797e-25, -2.2730980779233292e-24]],
        [[8.3191786698333460e-4, 7.5839459932665887e-3, 2.1631275858824592e-2, 4.4210224173107421e-2, 7.7649059114364175e-2, 1.2635348085174662e-1, 1.9963313469350006e-1, 3.2336320288256271e-1], [-1.8504728244230384e-5, -1.6983123998255328e-4, -4.9115368101205848e-4, -1.0260101713594640e-3, -1.8597490311143302e-3, -3.1630217082919143e-3, -5.3225537292388124e-3, -9.5105395701741832e-3], [2.0580455173688278e-7, 1.9015595640857389e-6, 5.5759988441292763e-6, 1.1905581699961389e-5, 2.2271142098686915e-5, 3.9590149237220646e-5, 7.0954098487029325e-5, 1.3985877507017737e-4], [-2.2889022176710604e-9, -2.1291305275386358e-8, -6.3303532706227768e-8, -1.3814958133080302e-7, -2.6670468008401500e-7, -4.9553245635857917e-7, -9.4587755205752418e-7, -2.0567157961756118e-6], [2.5456547573143535e-11, 2.3839362641666378e-10, 7.1867612693419985e-10, 1.6030553821606086e-9, 3.1938813942958902e-9, 6.2023614468699443e-9, 1.2609339876961140e-8, 3.0245366185394600e-8], [-2.8312079447543363e-13, -2.6692361215532538e-12, -8.1590292570551747e-12, -1.8601479161346809e-11, -3.8247841611233464e-11, -7.7632225748250118e-11, -1.6809306002330993e-10, -4.4477811537673231e-10], [3.1487924288998965e-15, 2.9886795128232067e-14, 9.2628314650359182e-14, 2.1584720705225218e-13, 4.5803121885757152e-13, 9.7168836841350270e-13, 2.2408212565987629e-12, 6.5407563824926892e-12], [-3.5020012494923886e-17, -3.3463525980614944e-16, -1.0515962628022586e-15, -2.5046404314086233e-15, -5.4850833042475954e-15, -1.2162195224976863e-14, -2.9872023885387628e-14, -9.6186148949050419e-14], [3.8948304870022272e-19, 3.7468305519685862e-18, 1.1938624857250495e-17, 2.9063260884732846e-17, 6.5685782131196090e-17, 1.5222883949838547e-16, 3.9821909415048086e-16, 1.4144809420057186e-15], [-4.3317244687663019e-21, -4.1952360833889612e-20, -1.3553753313646458e-19, -3.3724327125501957e-19, -7.8661010806383615e-19, -1.9053813174759164e-18, -5.3085940039709184e-18, -2.0800877847386608e-17], [4.8176260223141008e-23, 4.6973049340528690e-22, 1.5387385869341624e-21, 3.9132918942161983e-21, 9.4199298348739072e-21, 2.3848818419557181e-20, 7.0768003465278955e-20, 3.0589066696536404e-19], [-5.3580316717471537e-25, -5.2594586047152852e-24, -1.7469081213488423e-23, -4.5408918494852316e-23, -1.1280693172751218e-22, -2.9850514177544624e-22, -9.4339672805433745e-22, -4.4983245494588235e-21], [5.9590904950442205e-27, 5.8889498432986164e-26, 1.9832559028975716e-25, 5.2691741592767796e-25, 1.3509082412368407e-24, 3.7362661281801738e-24, 1.2576280649743263e-23, 6.6150854399955884e-23], [-6.6371727902891960e-29, -6.5991384252160401e-28, -2.2535502173863676e-27, -6.1175177123757939e-27, -1.6182579915288805e-26, -4.6768717536574243e-26, -1.6764167617662996e-25, -9.7261140281829240e-25]],
        [[7.9647248844517927e-4, 7.2587301676039427e-3, 2.0691301229510076e-2, 4.2248489031735281e-2, 7.4098172607666847e-2, 1.2032644631850216e-1, 1.8952198039456166e-1, 3.0538823252083591e-1], [-1.6961640181193429e-5, -1.5557972197931559e-4, -4.4940044363661073e-4, -9.3698722335938169e-4, -1.6935674824908691e-3, -2.8685093360724185e-3, -4.7971311545731510e-3, -8.4827898385249491e-3], [1.8060714074248748e-7, 1.6673060805586507e-6, 4.8803300599757523e-6, 1.0390253910373559e-5, 1.9353856625701011e-5, 3.4191759429819479e-5, 6.0711869056737328e-5, 1.1781351699540785e-4], [-1.9231005338353780e-9, -1.7868071307117005e-8, -5.2998660396432705e-8, -1.1521755433865286e-7, -2.2117321580671670e-7, -4.0755538014296868e-7, -7.6836153225633325e-7, -1.6362570629523950e-6], [2.0477128689562895e-11, 1.9148731955037512e-10, 5.7554672927805189e-10, 1.2776477786097859e-9, 2.5275371382737328e-9, 4.8579362587178977e-9, 9.7242837920138834e-9, 2.2725212219629727e-8], [-2.1803997866541626e-13, -2.0521181563665604e-12, -6.2502341588421937e-12, -1.4167839749388617e-11, -2.8884347329541889e-11, -5.7905123680338340e-11, -1.2306927311930643e-10, -3.1561988768156747e-10], [2.3216845006517991e-15, 2.1991998935370933e-14, 6.7875334969510930e-14, 1.5710721415158078e-13, 3.3008635482340256e-13, 6.9021147455730263e-13, 1.5575487418983435e-12, 4.3834976121400050e-12], [-2.4721241276731319e-17, -2.3568234395878996e-16, -7.3710215971689603e-16, -1.7421623320883793e-15, -3.7721815347748050e-15, -8.2271109934963386e-15, -1.9712134653108978e-14, -6.0880356611171101e-14], [2.6323118842577980e-19, 2.5257443589647518e-18, 8.0046690612794357e-18, 1.9318842917010256e-17, 4.3107972575279300e-17, 9.8064662489667706e-17, 2.4947421684364068e-16, 8.4553891641932903e-16], [-2.8028794258506054e-21, -2.7067723696470626e-20, -8.6927878221037239e-20, -2.1422670250492753e-19, -4.9263199088736825e-19, -1.1689009710066973e-18, -3.1573132978023460e-18, -1.1743296179041634e-17], [2.9844993373238140e-23, 2.9007752233728064e-22, 9.4400604819000829e-22, 2.3755604952190173e-21, 5.6297307403617267e-21, 1.3932944293476074e-20, 3.9958547159396625e-20, 1.6309717088282788e-19], [-3.1778878757987400e-25, -3.1086827426527186e-24, -1.0251571248488236e-23, -2.6342595417731817e-23, -6.4335786487585411e-23, -1.6607645668459153e-22, -5.0571017633408657e-22, -2.2651806269894801e-21], [3.3838694773897826e-27, 3.3315599875050609e-26, 1.1132965749193701e-25, 2.9211615110586844e-25, 7.3522585784458260e-25, 1.9795891928892931e-24, 6.4002152587037761e-24, 3.1460058467861641e-23], [-3.6032718568669352e-29, -3.5751422743649137e-28, -1.2106056666747952e-27, -3.2428522265429111e-27, -8.4071160557703860e-27, -2.3604577742060694e-26, -8.1005365343977429e-26, -4.3687793097629823e-25]],
        [[7.6392471223637531e-4, 6.9602650058563513e-3, 1.9829633617990259e-2, 4.0453490252420317e-2, 7.0857921917529217e-2, 1.1484835278055720e-1, 1.8038596682647798e-1, 2.8930705196059347e-1], [-1.5603834956119101e-5, -1.4304979961978260e-4, -4.1275414830623200e-4, -8.5906839612861671e-4, -1.5487067290423492e-3, -2.6132990930919720e-3, -4.3458472903401221e-3, -7.6130860592638750e-3], [1.5936103482306667e-7, 1.4700047450809866e-6, 4.2957421762306272e-6, 9.1215678130867800e-6, 1.6924660416746574e-5, 2.9731955159183911e-5, 5.2349938865045736e-5, 1.0016879808663041e-4], [-1.6275447344384758e-9, -1.5106025707859711e-8, -4.4707971852909478e-8, -9.6852590252061701e-8, -1.8495698691727938e-7, -3.3826558924099846e-7, -6.3060570611065884e-7, -1.3179659381244823e-6], [1.6622017204766507e-11, 1.5523216061043855e-10, 4.6529858292250442e-10, 1.0283785014540586e-9, 2.0212569213896620e-9, 3.8485060350703359e-9, 7.5962563701262346e-9, 1.7341070744944776e-8], [-1.6975966934074954e-13, -1.5951928160195852e-12, -4.8425988094917622e-12, -1.0919298487532010e-11, -2.2088808919085674e-11, -4.3785117886823089e-11, -9.1504263728558189e-11, -2.2816426880432557e-10], [1.7337453679458694e-15, 1.6392480206897079e-14, 5.0399386738722687e-14, 1.1594085182764279e-13, 2.4139211314533116e-13, 4.9815084889894197e-13, 1.1022574637467595e-12, 3.0020599260970392e-12], [-1.7706637934361647e-17, -1.6845199190653840e-16, -5.2453202992172041e-16, -1.2310572092032902e-15, -2.6379943120617234e-15, -5.6675482500735692e-15, -1.3277758509587598e-14, -3.9499452947238900e-14], [1.8083683609769338e-19, 1.7310421131586120e-18, 5.4590713938628510e-18, 1.3071336189450464e-17, 2.8828671739893936e-17, 6.4480675357464464e-17, 1.5994345861773757e-16, 5.1971207155724377e-16], [-1.8468758107318326e-21, -1.7788491329848811e-20, -5.6815330205762590e-20, -1.3879113700080476e-19, -3.1504704558672544e-19, -7.3360778084389048e-19, -1.9266738385227798e-18, -6.8380855219239473e-18], [1.8862032462270407e-23, 1.8279764632901678e-22, 5.9130601420176439e-22, 1.4736809939297648e-21, 3.4429141181669438e-21, 8.3463824337339114e-21, 2.3208652058373828e-20, 8.9971767375496572e-20], [-1.9263672251303119e-25, -1.8784602394155615e-24, -6.1540214759907929e-24, -1.5647508213225480e-23, -3.7625036926003114e-23, -9.4958230136047874e-23, -2.7957067986955624e-22, -1.1837990053758567e-21], [1.9674609178142816e-27, 1.9303556653675539e-26, 6.4049377745128817e-26, 1.6614777083736766e-25, 4.1118123776638390e-25, 1.0803635479314484e-24, 3.3677120036771426e-24, 1.5575797573323665e-23], [-2.0205976551393444e-29, -1.9899368504246996e-28, -6.6847509636353383e-28, -1.7676682469777401e-27, -4.4991554785130093e-27, -1.2299834713394742e-26, -4.0577708978795984e-26, -2.0492949709740923e-25]],
        [[7.3393311399890784e-4, 6.6853797046662164e-3, 1.9036877095530059e-2, 3.8804832696903418e-2, 6.7889244541949826e-2, 1.0984745368809329e-1, 1.7209048105647680e-1, 2.7483526334313233e-1], [-1.4402791774205827e-5, -1.3197492109064677e-4, -3.8041458952589781e-4, -7.9048072901128846e-4, -1.4216692466177870e-3, -2.3906959913603367e-3, -3.9553810077070017e-3, -6.8706043836047022e-3], [1.4132105973586016e-7, 1.3026470123099796e-6, 3.8009191107856940e-6, 8.0513139667276697e-6, 1.4885593884682941e-5, 2.6015292713725855e-5, 4.5455852119429121e-5, 8.5879089935181217e-5], [-1.3866507436866555e-9, -1.2857664355143735e-8, -3.7976950633625452e-8, -8.2005359791507743e-8, -1.5585967399017794e-7, -2.8309557443802474e-7, -5.2238570389992302e-7, -1.0734453151886317e-6], [1.3605900554104359e-11, 1.2691046085951803e-10, 3.7944737506678880e-10, 8.3525236530651114e-10, 1.6319293784657734e-9, 3.0806151269676520e-9, 6.0033375443506090e-9, 1.3417525099184544e-8], [-1.3350191512247829e-13, -1.2526586968442610e-12, -3.7912551703820482e-12, -8.5073282468832964e-12, -1.7087123488193080e-11, -3.3522917408161441e-11, -6.8991286327992697e-11, -1.6771229725438912e-10], [1.3099288261366114e-15, 1.2364259022875328e-14, 3.7880393201873182e-14, 8.6650019690347374e-14, 1.7891079905384711e-13, 3.6479272652945509e-13, 7.9285856476123678e-13, 2.0963191380244953e-12], [-1.2853100481513032e-17, -1.2204034632089469e-16, -3.7848261977679656e-16, -8.8255979955731457e-16, -1.8732862813453558e-15, -3.9696346146888757e-15, -9.1116536184974568e-15, -2.6202932047266773e-14], [1.2611539550204117e-19, 1.2045886536799333e-18, 3.7816158008083975e-18, 8.9891704881065976e-18, 1.9614251964854867e-17, 4.3197130392510367e-17, 1.0471253682990257e-16, 3.2752343639844952e-16], [-1.2374518510663661e-21, -1.1889787831140966e-20, -3.7784081270347786e-20, -9.1557746121697979e-20, -2.0537110850383919e-19, -4.7006645580257109e-19, -1.2033727167961046e-18, -4.0938777842456405e-18], [1.2141952057487230e-23, 1.1735711958292987e-22, 3.7752031729821083e-22, 9.3254665571436506e-22, 2.1503390636375000e-21, 5.1152118411389100e-21, 1.3829345934677016e-20, 5.1171407751388757e-20], [-1.1913756677788311e-25, -1.1583629799262839e-24, -3.7720000480724883e-24, -9.4983021555021839e-24, -2.2515131869485814e-23, -5.5663173039622859e-23, -1.5892898245283656e-22, -6.3961678162490341e-22], [1.1690262698662907e-27, 1.1433887306591665e-26, 3.7689421555546160e-26, 9.6746154978738709e-26, 2.3574925024105511e-25, 6.0572819840693429e-25, 1.8264480761363982e-24, 7.9949064814668390e-24], [-1.1578030506817986e-29, -1.1353610144384018e-28, -3.7820245684595937e-28, -9.8902027311896460e-28, -2.4746284860745561e-27, -6.6011598812856689e-27, -2.1003590643131987e-26, -9.9941915026600301e-26]],
        [[7.0620789140235041e-4, 6.4313856216211930e-3, 1.8305081392086452e-2, 3.7285317829326300e-2, 6.5159365244929461e-2, 1.0526398614195459e-1, 1.6452460269644114e-1, 2.6174271496964448e-1], [-1.3335274128161878e-5, -1.2213819799359001e-4, -3.5173237931155581e-4, -7.2979152241044271e-4, -1.3096464154399552e-3, -2.1953723510824931e-3, -3.6152743510434936e-3, -6.2316857926810928e-3], [1.2590452346836497e-7, 1.1597609198685402e-6, 3.3792711435211707e-6, 7.1421634196617367e-6, 1.3161375398820311e-5, 2.2893203727806214e-5, 3.9721137201067610e-5, 7.4183359455118223e-5], [-1.1887231471544622e-9, -1.1012487602976690e-8, -3.2466369697854273e-8, -6.9897356637784252e-8, -1.3226608368983422e-7, -2.3872887743366996e-7, -4.3641742986687537e-7, -8.8309504091341847e-7], [1.1223287945931969e-11, 1.0456886512391010e-10, 3.1192086002883555e-10, 6.8405610147478162e-10, 1.3292164659488622e-9, 2.4894496025262748e-9, 4.7949325349751054e-9, 1.0512557762468206e-8], [-1.0596427992407416e-13, -9.9293165609075031e-13, -2.9967817106314383e-12, -6.6945700448981987e-12, -1.3358045872839113e-11, -2.5959822666364039e-11, -5.2682080140511513e-11, -1.2514380173047045e-10], [1.0004580363544393e-15, 9.4283635238734836e-15, 2.8791599960146519e-14, 6.5516948082803560e-14, 1.3424253619480735e-13, 2.7070738535344794e-13, 5.7881973264211673e-13, 1.4897393636654145e-12], [-9.4457894983419833e-18, -8.9526845269785586e-17, -2.7661548564725085e-16, -6.4118688090447406e-16, -1.3490789517841398e-15, -2.8229194562200172e-15, -6.3595112797806723e-15, -1.7734185320932827e-14], [8.9182090607252319e-20, 8.5010044464876031e-19, 2.6575850944625691e-18, 6.2750269704901313e-18, 1.3557655194364870e-17, 2.9437225164354427e-17, 6.9872157835805616e-17, 2.1111164588102147e-16], [-8.4200958384966963e-22, -8.0721124912781787e-21, -2.5532766243734523e-20, -6.1411056048983094e-20, -1.3624852283725596e-19, -3.0696951819661886e-19, -7.6768767691006358e-19, -2.5131195045125239e-18], [7.9498040459424192e-24, 7.6648589503746511e-23, 2.4530621936225930e-22, 6.0100423836255287e-22, 1.3692382428128401e-21, 3.2010586798338337e-21, 8.4346095453527312e-21, 2.9916727796422865e-20], [-7.5057776722667368e-26, -7.2781497450449320e-25, -2.3567802596207497e-24, -5.8817751674524332e-24, -1.3760245525746217e-23, -3.3380432718455839e-23, -9.2671323498756311e-23, -3.5613530296924722e-22], [7.0871492635586233e-28, 6.9113089982544371e-27, 2.2643857853916533e-26, 5.7565152406240284e-26, 1.3828875353903502e-25, 3.4809608752306710e-25, 1.0181939271158481e-24, 4.2395321136627417e-24], [-6.7330510855777765e-30, -6.6148099923063682e-29, -2.1893003140164920e-28, -5.6620491472238122e-28, -1.3953258997134225e-27, -3.6399732583122958e-27, -1.1201712159723336e-26, -5.0485520212334314e-26]],
    ],
    [
        [[6.7841503486167163e-3, 6.3479525894633944e-2, 1.9123751266001517e-1, 4.2728215886474941e-1, 8.5845002744969599e-1, 1.7064161903182167e+0, 3.6643852190268321e+0, 9.8808327685959581e+0, 54.678015983902622e+0], [-4.4360740004389992e-4, -4.1647180868312016e-3, -1.2627276436853027e-2, -2.8467034929647497e-2, -5.7807859431940524e-2, -1.1622012689512670e-1, -2.5225003326434908e-1, -6.8605252510258479e-1, -3.8164891611228095e+0], [1.0830740144656697e-5, 9.8622773331591473e-5, 2.8100375365041029e-4, 5.7581294940078359e-4, 1.0265476701889867e-3, 1.7524003765466927e-3, 3.1526733136519173e-3, 7.1192599527842085e-3, 3.4572849844504446e-2], [-2.3359629777462968e-7, -1.9558222289377069e-6, -4.6496028999707595e-6, -6.9762288973032691e-6, -7.3860224013402358e-6, -4.7464111824921124e-6, 8.9859498011370432e-7, 7.8492227090397281e-6, 1.3008003328294781e-5], [4.6817707511884959e-9, 3.3230097196493752e-8, 5.0811732063906698e-8, 1.2677972912655508e-8, -8.2065392029221232e-8, -1.6550532035589855e-7, -1.4116408704451292e-7, 1.6679028251138473e-8, 1.9638138378299263e-7], [-8.9089708867223606e-11, -4.6879640312626535e-10, -7.2441532786516975e-11, 1.2839164229051736e-9, 1.6269975035402415e-9, -7.1671352399177209e-10, -3.4364216795320654e-9, -2.0653923265564426e-9, 2.6101647935177828e-9], [1.6251257813606068e-12, 4.7787908862089425e-12, -1.1424280683132865e-11, -1.9029647506613322e-11, 2.1907687607753093e-11, 4.4885868271882819e-11, -2.5724130960789468e-11, -6.7279437587471493e-11, 2.6244317271859271e-11], [-2.8544533992564584e-14, -9.2865549655358103e-15, 2.6821374463442628e-13, -1.7988657523134945e-13, -6.3549640229892988e-13, 6.6271741333664282e-13, 7.0384282309245740e-13, -1.2665318954646333e-12, 4.4037937562192852e-14], [4.8291903599998095e-16, -1.0954876817958668e-15, -2.2361689255452797e-15, 9.5448251080241290e-15, -6.7745164311124056e-15, -1.2114475007776342e-14, 2.4131074485249480e-14, -1.2848350300088578e-14, -7.3414287037678114e-15], [-7.8525763586186867e-18, 3.4462845614818013e-17, -4.4229842476773303e-17, -6.5226720141233759e-17, 2.9064102137019845e-16, -3.9258363676259577e-16, 1.9892883487994001e-16, 1.0004514590045546e-16, -2.7241570511181225e-16], [1.2191625033346710e-19, -6.6555032457194130e-19, 1.8965814300817603e-18, -3.0556210771830663e-18, 2.0364227562257522e-18, 1.9668923874739708e-18, -6.4218831899881067e-18, 8.0206582677054195e-18, -7.0307191159239983e-18], [-1.7868494075232356e-21, 8.4406076198323369e-21, -2.8526257690793874e-20, 7.4454835850673062e-20, -1.4234457290051708e-19, 2.0230205073101386e-19, -2.2376023473734114e-19, 1.9917262838038456e-19, -1.5254679721957300e-19], [2.4110975265861358e-23, -2.7014459347849765e-23, -7.1758676234305068e-23, 2.4508000138303756e-22, -4.6509883753873452e-22, 8.6811594914392847e-22, -1.7033420368671136e-21, 2.6402396780065802e-21, -2.9202886819956010e-21], [-2.8418724323518313e-25, -2.1702209805100241e-24, 1.3697059514001447e-23, -3.8461402640506083e-23, 7.1878032354292403e-23, -9.3182179002313595e-23, 7.0920470614435087e-23, -5.6662715815662152e-24, -5.0074502944941801e-23]],
        [[5.9755223613156492e-3, 5.5870686194261061e-2, 1.6806393455839903e-1, 3.7469311126347507e-1, 7.5075199257278459e-1, 1.4877825371248480e+0, 3.1851100257620198e+0, 8.5659808039402989e+0, 47.322155225031408e+0], [-3.6702354004781142e-4, -3.4612495478438169e-3, -1.0588801418408968e-2, -2.4190157677766689e-2, -4.9969701679702388e-2, -1.0247445063174304e-1, -2.2702931225078726e-1, -6.2872091851370249e-1, -3.5392243730064615e+0], [8.4244263287521881e-6, 7.8053391441099319e-5, 2.2999697246871004e-4, 4.9407903226317261e-4, 9.3118616547130645e-4, 1.6792864922597992e-3, 3.1475502339428952e-3, 7.2133696512611661e-3, 3.4749631760640653e-2], [-1.7106652501203896e-7, -1.4930632147352940e-6, -3.8607093598000041e-6, -6.5938957415748030e-6, -8.4165451736648330e-6, -7.4452768163303585e-6, -1.9350682531628325e-6, 7.6850667373702052e-6, 1.6601758048039282e-5], [3.2332954109477091e-9, 2.4963796400277090e-8, 4.7183060791678050e-8, 3.3547810253854194e-8, -4.5793409949552645e-8, -1.6784237405839479e-7, -2.1399899863013527e-7, -4.3864820525566747e-8, 2.5479928032906602e-7], [-5.8162437349503610e-11, -3.6020693589579193e-10, -2.6559885524189582e-10, 7.9842267121650420e-10, 1.9246856114405298e-9, 5.2733205646054217e-10, -3.7257008255598945e-9, -4.1461077203489196e-9, 3.2168995305090864e-9], [1.0056395133961048e-12, 4.1819105212693089e-12, -5.0652273546526381e-12, -2.0274566452501933e-11, 2.6932208303287669e-12, 5.6099440600109926e-11, 5.4016070673162920e-12, -1.0740582877222504e-10, 2.2237105481889133e-11], [-1.6808412352468241e-14, -2.8938326413056695e-14, 1.8339097026514545e-13, 7.0746151093284293e-14, -6.8126977868163247e-13, 8.1488760955116191e-14, 1.5210343852098106e-12, -1.5389110831772285e-12, -4.1811238515543041e-13], [2.7180365677337408e-16, -2.5011221986866855e-16, -2.7597658216476230e-15, 5.7724516526073701e-15, 3.6789998042863520e-15, -2.2713342149396702e-14, 2.4204841495431717e-14, -1.0509774465158892e-15, -2.4284305596853152e-14], [-4.2553560622397921e-18, 1.4616402527140450e-17, 7.4482265729385718e-18, -1.2441771873206359e-16, 2.5276482672620960e-16, -1.4265305824656919e-16, -2.6075848166816975e-16, 6.2853742956152980e-16, -7.4044669062433112e-16], [6.4152327048065461e-20, -3.4697265843636527e-19, 7.4405054175059871e-19, -8.0138609874267753e-20, -3.5139009689247372e-18, 9.8828834943818845e-18, -1.6152331300013578e-17, 1.8969338528484390e-17, -1.8003439312613383e-17], [-9.2956252050079612e-22, 5.7572632359423874e-21, -2.1255159454713494e-20, 5.1645378915417121e-20, -8.7301237064684525e-20, 1.1399033531004841e-19, -1.6270185081825122e-19, 2.7022392743059919e-19, -3.7974540695151403e-19], [1.2664396969285124e-23, -6.5449475858888374e-23, 2.6513638408569326e-22, -9.0572012717891736e-22, 2.3173666457458232e-21, -4.4407868613576929e-21, 5.2317782626088744e-21, -1.0774565598842738e-21, -7.1873672937634641e-21], [-1.6254503427897213e-25, 1.3220997453182633e-25, 1.0317845354854107e-24, -5.8414840121974587e-24, 2.2845928857176667e-23, -7.9789627911725341e-23, 1.7929747245061661e-22, -1.6876229546559645e-22, -1.2326577864403757e-22]],
        [[5.3029375989607508e-3, 4.9520331402148953e-2, 1.4858837139512842e-1, 3.3002199598101973e-1, 6.5793538153968825e-1, 1.2959536079820610e+0, 2.7561135257271376e+0, 7.3665247632293228e+0, 40.522386646760014e+0], [-3.0704048181657008e-4, -2.9022127982165653e-3, -8.9217445633748596e-3, -2.0543860888274857e-2, -4.2933744878561216e-2, -8.9441910562292962e-2, -2.0200554092656918e-1, -5.7066429326966280e-1, -3.2603560784947977e+0], [6.6474867140219682e-6, 6.2312305081190759e-5, 1.8800569175069472e-4, 4.1861682197370803e-4, 8.2705619310710719e-4, 1.5744137925118151e-3, 3.1013923859020869e-3, 7.2981498175932041e-3, 3.4975515191826468e-2], [-1.2747242153648510e-7, -1.1461087579893751e-6, -3.1533100597853904e-6, -5.9548245916005971e-6, -8.8439274910907895e-6, -9.9739624346012059e-6, -5.9322226956259177e-6, 6.1653998539845063e-6, 2.1216315917874055e-5], [2.2778161009682065e-9, 1.8694761015509481e-8, 4.1021450846067978e-8, 4.4901365231066047e-8, -8.0980340316747015e-9, -1.4408115829682996e-7, -2.8336845392063596e-7, -1.5596472767258770e-7, 3.2294648424960937e-7], [-3.8817516947296956e-11, -2.7006706274869635e-10, -3.3511226229783165e-10, 3.5241183387803977e-10, 1.7810093060478394e-9, 1.8171164666415497e-9, -3.0108474990150364e-9, -7.2180419318612600e-9, 3.4917570761192608e-9], [6.3685734756082178e-13, 3.3221989948278345e-12, -1.0948791559509045e-12, -1.6363476136312546e-11, -1.3593041675441554e-11, 4.8013787289217571e-11, 5.6480514745333466e-11, -1.4639693851607960e-10, -5.5710643366843510e-12], [-1.0136942339122373e-14, -3.0759549981760745e-14, 1.0350864480377521e-13, 1.8684419184585823e-13, -4.5053922051611335e-13, -6.4561343767036316e-13, 2.0124573685639755e-12, -1.0433093767907186e-12, -1.8004533263719038e-12], [1.5637287939283060e-16, 7.9229162374945321e-17, -2.1471573148786175e-15, 1.6646200106084425e-15, 9.6352380376911763e-15, -2.0173763877658203e-14, 2.3746806714890541e-15, 3.7665939254489892e-14, -6.9034272370647089e-14], [-2.3549700571473800e-18, 4.9285907319889425e-18, 2.2229535007828539e-17, -9.5150181688335832e-17, 6.9677676547123647e-17, 2.8049350398797654e-16, -9.4406562998789496e-16, 1.5680818938112072e-15, -1.9207094167065449e-15], [3.4067527146099589e-20, -1.5744690224402550e-19, 8.2818369859023219e-20, 1.2359483237917724e-18, -4.8122382213674809e-18, 9.3794056247296497e-18, -1.4695421959170600e-17, 2.5326431978944620e-17, -4.4684638459148597e-17], [-4.8673332625526669e-22, 3.0214187723305915e-21, -9.3219480017496486e-21, 1.0069474364163229e-20, 2.4100466948575910e-20, -1.3960637516013189e-19, 2.8635980843375137e-19, -1.0907608555247675e-19, -8.7771957911405445e-19], [6.5086197319166418e-24, -4.5451839881406920e-23, 2.0583624526361205e-22, -6.8774074619404042e-22, 1.8390075526965273e-21, -4.7474799146902600e-21, 1.2109971589586170e-20, -1.7034312050157521e-20, -1.2030336133494318e-20], [-7.8191417495943276e-26, 5.1730575153004073e-25, -2.1056733384956350e-24, 1.0383341207676572e-23, -3.2143003301726399e-23, 7.4937490535672778e-23, 1.9717464730028838e-23, -4.2195035663679044e-22, 9.0471537983670866e-23]],
        [[4.7375941514408475e-3, 4.4174187757461985e-2, 1.3213663917829873e-1, 2.9206581787829099e-1, 5.7834841786984392e-1, 1.1292604785041124e+0, 2.3766310937500058e+0, 6.2837776788743034e+0, 34.282350241420626e+0], [-2.5941374654861609e-4, -2.4540263859867454e-3, -7.5584143659448366e-3, -1.7468138546380909e-2, -3.6741433228352450e-2, -7.7361407063301881e-2, -1.7756022849267990e-1, -5.1203782647708359e-1, -2.9794405786762352e+0], [5.3133173150941910e-6, 5.0188701850232687e-5, 1.5388060851443598e-4, 3.5163796981139771e-4, 7.2125953014865036e-4, 1.4422769129538619e-3, 3.0013055295820757e-3, 7.3517600631008108e-3, 3.5263335167980652e-2], [-9.6494953838391271e-8, -8.8615712129941649e-7, -2.5511572569788804e-6, -5.1995048563996476e-6, -8.7099049574047820e-6, -1.1933228905386369e-5, -1.0855325801253360e-5, 2.3174267424257544e-6, 2.6912289477007809e-5], [1.6339419969079404e-9, 1.4023021762282402e-8, 3.4254231969890222e-8, 4.8465091079622850e-8, 2.3423299768147198e-8, -9.8008904931914010e-8, -3.2556697165905604e-7, -3.3687800176305426e-7, 3.8574848528004106e-7], [-2.6443384936621283e-11, -2.0025672723114221e-10, -3.3362915363334514e-10, 2.5675290348179027e-11, 1.3393020368609625e-9, 2.6911304278086156e-9, -1.0052057557945931e-9, -1.0887314177552670e-8, 2.4252149364501803e-9], [4.1199018976041123e-13, 2.5157685602037622e-12, 9.6244311067000511e-13, -1.0830499802559410e-11, -2.1760772704478261e-11, 2.2846725184725750e-11, 1.0816709728995987e-10, -1.4899371189289187e-10, -1.0024479017844546e-10], [-6.2633671894736655e-15, -2.6375166558679763e-14, 4.7599567398951354e-14, 1.9521477138466130e-13, -1.3585644950689429e-13, -1.0725172189633950e-12, 1.4658133030121331e-12, 1.2337682013439438e-12, -5.5444766287717734e-12], [9.1709103074329816e-17, 1.7022492870293170e-16, -1.3623779039781849e-15, -8.3767205593655249e-16, 9.1244169523238923e-15, -5.2825008422319713e-15, -3.7662251802602386e-14, 1.0843727025068456e-13, -1.8078579134325684e-13], [-1.3403737273972670e-18, 7.4815198660737859e-19, 1.9879927303819670e-17, -4.4530577996180346e-17, -8.1959948600082288e-17, 4.8418552471142154e-16, -1.1199469304231721e-15, 2.1685992841687333e-15, -4.5831974595468410e-15], [1.8424836883047029e-20, -6.2423328265665197e-20, -1.4542122437745117e-19, 1.1553175551679459e-18, -2.4372801339875951e-18, 1.2954346053772237e-19, 9.2193435849305032e-18, -4.7570056668549092e-18, -8.7719184131059832e-17], [-2.4207372482657644e-22, 1.5355558744202844e-21, -1.7343631904822502e-21, -9.1499527038874662e-21, 7.0109297300510429e-20, -2.3019095584948876e-19, 7.2509309557263842e-19, -1.3887030639593546e-18, -6.8423198549177363e-19], [4.2445649758040423e-24, -1.5733572881637884e-23, 1.2113888770820466e-22, -1.2032510826470952e-22, 1.5302955919912216e-22, 1.4288817950441110e-21, 2.6580532715688465e-21, -3.2250252100841037e-20, 4.0124404681034914e-20], [-1.4783357254005618e-26, 5.9104210171565163e-25, -9.5607586399512471e-25, 9.6829423755061388e-24, -2.4680176513777400e-23, 1.2595302790834102e-22, -3.7309741877769084e-22, 6.2030626679543977e-23, 2.4099467331985029e-21]],
        [[4.2578956404563832e-3, 3.9636475083929347e-2, 1.1816016016432720e-1, 2.5975434205209627e-1, 5.1031037184369634e-1, 9.8560638637518537e-1, 2.0450456751374047e+0, 5.3185278383496941e+0, 28.606674198715520e+0], [-2.2113151079477606e-4, -2.0915223286832459e-3, -6.4410049396164620e-3, -1.4891472297249439e-2, -3.1381214054311490e-2, -6.6418412473039752e-2, -1.5415994785042404e-1, -4.5322186123478828e-1, -2.6959346641514250e+0], [4.2963742005657342e-6, 4.0778824638957678e-5, 1.2634004027202431e-4, 2.9387266929214719e-4, 6.1977913705559453e-4, 1.2915136801540003e-3, 2.8396119156863801e-3, 7.3394649339176959e-3, 3.5624314416627921e-2], [-7.4099774025517830e-8, -6.9078913047252634e-7, -2.0548426096833492e-6, -4.4322903760519403e-6, -8.1499599716882988e-6, -1.3051349460204349e-5, -1.6073115831127206e-5, -4.9891951160880359e-6, 3.3274840040540701e-5], [1.1912883330826320e-9, 1.0565086810452299e-8, 2.7897784288344139e-8, 4.6801179535073906e-8, 4.4835612487563507e-8, -4.1167276114022215e-8, -3.1723418920081743e-7, -5.8526772129916509e-7, 3.9350347769977983e-7], [-1.8368443318062516e-11, -1.4811405821320987e-10, -2.9884417236428302e-10, -1.7287635029129654e-10, 8.0113999942668570e-10, 2.8756706430309632e-9, 1.9139645885417937e-9, -1.3589122007591768e-8, -2.6745084671082331e-9], [2.7135818098882970e-13, 1.8548563009899306e-12, 1.7840833490059890e-12, -5.9219477960329844e-12, -2.2019843895082160e-11, -7.0278743463494526e-12, 1.2714287327790839e-10, -5.5211812254678815e-11, -3.6619392262988437e-10], [-3.9758227721359939e-15, -2.0855854006388394e-14, 1.4278505619355972e-14, 1.5085545461733965e-13, 9.6103806078451327e-14, -9.7942011180135967e-13, -2.5170144550537127e-13, 5.7714361747886568e-12, -1.4649172899813181e-11], [5.4685193921958583e-17, 1.6722437974619960e-16, -7.5533791653517885e-16, -1.7098082315396300e-15, 5.1541035040157999e-15, 1.0133551700766860e-14, -6.3865376430248421e-14, 1.6462751530275425e-13, -4.0687245548138706e-13], [-7.5851861683217208e-19, -5.1984762886330129e-19, 1.4096766749038274e-17, -6.5341725933097888e-18, -1.1927415381926477e-16, 3.2655104886596671e-16, -1.5135557763241266e-16, 3.6711030179916120e-16, -7.5409288922066597e-15], [1.2046084921879314e-20, -1.9610446525324682e-21, -1.0874908754366563e-19, 7.7038225158226146e-19, 4.6322093603890486e-19, -6.6668843446362165e-18, 3.6366334965698968e-17, -9.1878839455109637e-17, -1.4342263416633519e-17], [-5.3984819888461778e-23, 1.3748790020410858e-21, 3.0446807093527192e-21, -5.9879134354567502e-21, 5.5920344134784384e-20, -5.1731004540813448e-20, 3.3713816626097648e-19, -2.2195470912512191e-18, 5.7196601091740937e-18], [3.3482598840891512e-24, 3.5906993439295697e-24, 7.2587151987422846e-23, 1.6925944507439760e-22, -6.0112244054807749e-22, 4.7261798381137321e-21, -1.8283097504581740e-20, 1.2247304707332901e-20, 2.4940975411200413e-19], [-4.4177550699405396e-26, -5.0999392658076408e-26, -1.6230518992499085e-24, 1.0978836415115394e-25, -8.7785574111865261e-24, -1.7933490953529010e-23, -3.0846687514538329e-22, 1.6948607525598120e-21, 4.7560924735661883e-21]],
        [[3.8473994846427935e-3, 3.5755300445533790e-2, 1.0621585334513962e-1, 2.3216273685839436e-1, 4.5220577551439477e-1, 8.6260063301652155e-1, 1.7587735663809563e+0, 4.4704841556214469e+0, 23.501134256019192e+0], [-1.9001907149297555e-4, -1.7957862675150882e-3, -5.5217674983594311e-3, -1.2740817228168968e-2, -2.6800946835441907e-2, -5.6719697012734220e-2, -1.3229689208597537e-1, -3.9492562320794237e-1, -2.4092439020265568e+0], [3.5104681411579450e-6, 3.3413166278274659e-5, 1.0417068080210603e-4, 2.4504263957553801e-4, 5.2672277710940961e-4, 1.1327900616492316e-3, 2.6180638278503394e-3, 7.2143825367538925e-3, 3.6057625223262289e-2], [-5.7658843878759661e-8, -5.4321513028912452e-7, -1.6538741236207797e-6, -3.7175298092258363e-6, -7.3319201141149139e-6, -1.3267627115865968e-5, -2.0683347536189391e-5, -1.6534207954886139e-5, 3.8496401718780307e-5], [8.8095502489994283e-10, 8.0037293606650604e-9, 2.2369252884270031e-8, 4.2232390544311243e-8, 5.5871916510037848e-8, 1.2666739871244708e-8, -2.5018838329170291e-7, -8.5418950228194883e-7, 2.1027182701446391e-7], [-1.3015957559540362e-11, -1.1001526253278563e-10, -2.5351359867351953e-10, -2.7051334238528363e-10, 3.1986094827910302e-10, 2.4235410365993155e-9, 4.6552931230975856e-9, -1.2397195324300757e-8, -1.8094783670856913e-8], [1.8107705956905909e-13, 1.3435800310293588e-12, 1.9175480698308436e-12, -2.4592879647313904e-12, -1.7614841169686961e-11, -2.8518910172825228e-11, 9.2750210395359876e-11, 1.7607565244219793e-10, -9.9622603654016413e-10], [-2.5720965238706313e-15, -1.5699874845260570e-14, -2.3048588638663874e-15, 9.7938273365721918e-14, 2.0014239524926050e-13, -5.1929985739271390e-13, -2.0900370323367141e-12, 1.0375001609266281e-11, -3.1389159753697077e-11], [3.5820613339891215e-17, 1.6173507331991708e-16, -2.8755026713752219e-16, -1.4351597462435934e-15, 1.6963625464814847e-15, 1.7086046737690814e-14, -4.2208255515185580e-14, 9.2265901055117704e-14, -5.9055849085150553e-13], [-2.8982880501759293e-19, 5.9845473708403170e-19, 1.3018864624872634e-17, 2.0903773249556306e-17, -6.1846772318285861e-17, 7.1753815943606192e-17, 1.3041177264404315e-15, -4.7410226391859860e-15, 1.1276791425975667e-15], [1.1799208545766477e-20, 5.4624243318109444e-20, 5.5565690787038629e-20, 6.2394987412565464e-19, 2.1011291774904833e-18, -5.0048260747861619e-18, 2.8689616157651610e-17, -1.4200153575703786e-16, 5.6071791804398939e-16], [-3.4785576069612147e-24, 8.6487390121742564e-22, 2.9812061711683924e-21, -3.4392299575411920e-21, 1.3337402513943295e-20, 9.0335672236461823e-20, -6.9770352654107244e-19, 7.1563818760341739e-19, 2.0708940014152534e-17], [-2.4711876561735563e-24, -3.8089808555983971e-23, -1.0869623017869731e-22, -1.7408243156072511e-22, -1.2596962646588108e-21, 2.3323210350452213e-22, -1.9647360560057351e-20, 1.0550403483369112e-19, 2.6467944785158878e-19], [-1.8040666060976799e-25, -1.5294602440763280e-24, -5.3139251960066286e-24, -1.2314981518941476e-23, -1.7608514519680123e-23, -1.2577040818650417e-22, 2.7472503673455871e-22, 1.1057662299773209e-21, -8.2262864026747746e-21]],
        [[3.4934110496445776e-3, 3.2411824289706280e-2, 9.5946887586068262e-2, 2.0850800444509284e-1, 4.0255001100219310e-1, 7.5772408564207522e-1, 1.5142953833607845e+0, 3.7375444914704277e+0, 18.972586249334418e+0], [-1.6448169370876058e-4, -1.5525347874819261e-3, -4.7620728333685277e-3, -1.0947858061883466e-2, -2.2923552833128719e-2, -4.8287355058609241e-2, -1.1240547936366874e-1, -3.3825338985944594e-1, -2.1189154553805776e+0], [2.8952465332322808e-6, 2.7595625760000770e-5, 8.6312327833476057e-5, 2.0430001002193742e-4, 4.4424556879419536e-4, 9.7626282641487983e-4, 2.3492502105011611e-3, 6.9268106268293211e-3, 3.6522713356494369e-2], [-4.5432240144597908e-8, -4.3114440253377028e-7, -1.3340626874788540e-6, -3.0874510885900505e-6, -6.4077663065670639e-6, -1.2718195078720295e-5, -2.3842591863187593e-5, -3.1852797129682909e-5, 3.7331632557107209e-5], [6.5890102630839571e-10, 6.0934416188818068e-9, 1.7750498739417019e-8, 3.6430740912336239e-8, 5.8520609250955853e-8, 5.3440246279941399e-8, -1.4014412557046869e-7, -1.0354225353131420e-6, -4.7207139653466291e-7], [-9.4112562330443091e-12, -8.2423612202486583e-11, -2.0885421262444629e-10, -3.0096243014433380e-10, -3.0983879450488434e-11, 1.6275736691732377e-9, 6.0759626235219927e-9, -4.5454012333272567e-9, -5.4447169555864336e-8], [1.2416867464085775e-13, 9.8290591625032948e-13, 1.7985606284620398e-12, -2.1535079718337467e-13, -1.1469113782058321e-11, -3.5249877239791362e-11, 2.3538449809819984e-11, 4.7525135028064942e-10, -2.0916956138641700e-9], [-1.5055214736334639e-15, -9.7281226362512652e-15, -3.4558165447544502e-15, 6.8329945261748936e-14, 2.3497255046477827e-13, 3.7197513372246103e-14, -2.5420844435423777e-12, 9.6552646109099903e-12, -4.3397129000421395e-11], [3.3266860156054068e-17, 2.2463939960026336e-16, 2.3123576410181237e-16, -3.0978529695385342e-16, 9.3833592452644568e-16, 1.6889734731973024e-14, 1.5954481015068653e-14, -1.5889718433787893e-13, 8.9497204582450770e-14], [1.0866770831589225e-19, 2.7007284454122454e-18, 1.5307355201253955e-17, 3.7996468405688289e-17, 1.2962270506277113e-17, -6.7531244187331350e-17, 1.6281565719500346e-15, -8.2461828391243863e-15, 4.2907555109417046e-14], [5.5231037472935599e-21, 2.2163240563977383e-20, -2.8571603569892416e-20, 5.5064422998850760e-20, 1.0530714265034418e-18, -2.8826338279444653e-18, -1.5705087753098692e-17, 2.2306002965571991e-18, 1.4653646706193806e-15], [-3.5801951019066024e-22, -2.9990474343649926e-21, -8.9110151945388140e-21, -2.7255191452648923e-20, -6.6309784416041895e-20, -3.1843702621563557e-20, -1.1294592594362662e-18, 5.3889599741829003e-18, 1.0822367038443978e-17], [-1.1692879308025119e-23, -1.1738842818331572e-22, -3.6261586782449391e-22, -7.5463766185080455e-22, -1.8782978629914967e-21, -4.3640188375733388e-21, 3.7660645537031051e-21, 4.7760906386270441e-20, -9.3609854541762798e-19], [-1.0485223871963136e-25, -8.4507499245904232e-25, -2.3818615708905823e-24, -4.7424227703960469e-24, 3.7529560583519347e-24, -1.7156367171633536e-23, 5.1653928740016868e-22, -3.5037471350997544e-21, -3.6891984939818269e-20]],
        [[3.1860009128076960e-3, 2.9512228587989353e-2, 8.7065754530401505e-2, 1.8813605920134892e-1, 3.6002452541077031e-1, 6.6848789363892013e-1, 1.3073516444332888e+0, 3.1150412170601824e+0, 15.028198100225364e+0], [-1.4333456322333870e-4, -1.3509246497388072e-3, -4.1310833853660056e-3, -9.4522025568464239e-3, -1.9661376343565565e-2, -4.1071008694885081e-2, -9.4784720114910268e-2, -2.8465195428675229e-1, -1.8251726656847683e+0], [2.4075933751594640e-6, 2.2956400181752170e-5, 7.1877336844418942e-5, 1.7055016673698783e-4, 3.7290773111429651e-4, 8.2970358452788274e-4, 2.0537326006719380e-3, 6.4444027857003419e-3, 3.6879536844641802e-2], [-3.6245823165829506e-8, -3.4563225540577133e-7, -1.0811376600221202e-6, -2.5523478964992613e-6, -5.4890446532661684e-6, -1.1647289859230723e-5, -2.5104579753842302e-5, -4.8448926525165099e-5, 1.7954365018883842e-5], [4.9770143435088449e-10, 4.6633789136418827e-9, 1.4003606589093167e-8, 3.0514188031421006e-8, 5.5701148359661365e-8, 7.7918902993664525e-8, -1.8236333915924449e-8, -9.9446529086602333e-7, -2.1522236638194954e-6], [-6.8125832884211951e-12, -6.1202539412096605e-11, -1.6553722685597635e-10, -2.8308307177708502e-10, -2.2334640956484649e-10, 8.5197110096414555e-10, 5.8919673927682799e-9, 9.2683447236198973e-9, -1.1706966085213888e-7], [9.7580854437917852e-14, 8.2499797737302628e-13, 1.8806852205365711e-12, 1.7510160543065566e-12, -4.3818757757715575e-12, -2.7199574454837000e-11, -3.3076333978107489e-11, 6.3266453527925605e-10, -2.9535790210136674e-9], [-3.7682262325159318e-16, -1.1727102827932956e-15, 1.1461659698576212e-14, 7.7740078622065152e-14, 2.7339603422294203e-13, 5.1018547940065068e-13, -1.3052532791619868e-12, 3.1225458296280527e-13, -4.6522219781180128e-12], [3.5801211892936523e-17, 2.9061384286944499e-16, 6.2009089540229654e-16, 7.1188441063656379e-16, 1.2376486738048127e-15, 1.1508109547402689e-14, 5.2433376063988128e-14, -3.9629710441603382e-13, 2.6322965135610386e-12], [-1.5530005248231219e-19, -7.2687096073732741e-19, 1.2123534461216383e-18, 5.7784601804607559e-18, -2.6795461439024220e-17, -2.6802876184209070e-16, 1.4831239578190566e-16, -3.4863891728382619e-15, 9.0916179404729254e-14], [-2.2613523834374055e-20, -2.3139391568818318e-19, -7.8962246096704910e-19, -1.8884224708280979e-18, -3.4884767898733057e-18, -8.2635189749377035e-18, -5.2815635762202865e-17, 2.1503924558138610e-16, 2.8392932380400098e-16], [-8.6989500517563196e-22, -7.9840472679757385e-21, -2.3823451205148385e-20, -5.6245418174167685e-20, -1.2468180004859920e-19, -1.7745011459923293e-19, -3.8963125268311573e-19, 2.5842852037619076e-18, -7.7028413837892708e-17], [-4.8679112731934400e-24, -4.5434599171368494e-23, -1.1826586220784652e-22, -1.2470963999980562e-22, 9.5605622135858471e-23, 5.7994124147835627e-23, 2.4707918361790869e-20, -1.5572888842479901e-19, -2.3880484384749507e-18], [4.4766360176847852e-25, 4.3537213778493030e-24, 1.3872466905970695e-23, 3.3199900829699068e-23, 7.8626881309226154e-23, 1.8497209491372550e-22, 2.6151754565067040e-22, -2.3705540100507629e-21, 4.1634005469137189e-21]],
        [[2.9173044397442945e-3, 2.6981734920197045e-2, 7.9340056507204960e-2, 1.7050465296615596e-1, 3.2348690635053933e-1, 5.9255659311193324e-1, 1.1332602873594332e+0, 2.5952731417730231e+0, 11.673025395683889e+0], [-1.2568777817529207e-4, -1.1826813779752109e-3, -3.6043853010461297e-3, -8.2024256618522582e-3, -1.6926801361005449e-2, -3.4970164748440479e-2, -7.9556211921128746e-2, -2.3567342046445260e-1, -1.5300623264534676e+0], [2.0163342200820729e-6, 1.9219601416606548e-5, 6.0147111896063890e-5, 1.4267404242135124e-4, 3.1222784538525573e-4, 6.9787850421598798e-4, 1.7544500403042430e-3, 5.7762805277755244e-3, 3.6799008274232489e-2], [-2.9246768666886643e-8, -2.7972813269472965e-7, -8.8096606920174094e-7, -2.1063480505216871e-6, -4.6366153317623794e-6, -1.0294274076993856e-5, -2.4505876562845789e-5, -6.2076126231415468e-5, -3.8898905756758453e-5], [3.8463290723578740e-10, 3.6397083942122927e-9, 1.1181023162915853e-8, 2.5460925801795805e-8, 5.0817647189281184e-8, 8.9755296169171891e-8, 8.9650618991798173e-8, -6.6422243985327337e-7, -5.1513476133431263e-6], [-4.4810743627278391e-12, -4.0850940882008554e-11, -1.1453579359327380e-10, -2.1281028739784907e-10, -2.3428343107033289e-10, 4.0066610364403864e-10, 4.8391072256427988e-9, 2.3070510222105113e-8, -1.7709685139248633e-7], [1.0054814667003815e-13, 9.0169576870206374e-13, 2.4307040044228320e-12, 4.1467579198256373e-12, 3.4318969960950422e-12, -9.7455001430853033e-12, -4.8321296652485475e-11, 4.5743467568119600e-10, -1.4444907801272795e-9], [4.3018965583567307e-16, 5.2385859133743800e-15, 2.3889628013392042e-14, 8.4637176126602251e-14, 2.6069491510263539e-13, 6.4666177670184770e-13, 3.9476327563151309e-14, -1.2634842077996872e-11, 1.2568198655266735e-10], [4.8955711553799619e-18, 1.5201326148136648e-17, -1.4791379518332779e-16, -9.9413928553449139e-16, -3.4177596986222575e-15, -5.6678213012204954e-15, 1.9116056660540814e-14, -3.6080934693428645e-13, 5.0244958812383073e-12], [-1.7773183110869257e-18, -1.6528373037142313e-17, -4.9490151324658190e-17, -1.1277396190083852e-16, -2.5629584711905003e-16, -7.1237565139802138e-16, -1.9142630045201399e-15, 5.0825949650407437e-15, 6.9502540273200285e-15], [-5.3571778709395376e-20, -5.1126436111847957e-19, -1.5896147249680880e-18, -3.6244837585721293e-18, -6.9514237289340460e-18, -1.1718758178022291e-17, -3.9515061986886665e-17, 1.6246604489274290e-16, -4.8696495415545049e-15], [-1.5095259883746326e-22, -1.0647451433326408e-21, -1.2032294605331552e-21, 3.3421668208957956e-21, 2.2273053986013456e-20, 1.3783622547815080e-19, 1.0991167388007891e-18, -3.9997101320643356e-18, -1.2342652335145133e-16], [4.4096028499865581e-23, 4.1985860166428368e-22, 1.3169825683710797e-21, 3.1648632214297847e-21, 7.0447991825806606e-21, 1.4852610372546255e-20, 3.8611130839355738e-20, -3.3426540319390574e-20, 1.8627126139719888e-18], [1.5053214278947087e-24, 1.4175148207789580e-23, 4.3084095539887343e-23, 9.6720215767147647e-23, 1.9446736085629790e-22, 3.8769853475179208e-22, 4.0410792502449524e-22, 7.0051513172487896e-21, 1.5865503739308109e-19]],
        [[2.6810180873285256e-3, 2.4760162146008339e-2, 7.2581031666412400e-2, 1.5516585231318606e-1, 2.9196448227941497e-1, 5.2782570879277263e-1, 9.8727404672648884e-1, 2.1676752633735731e+0, 8.9046448239958406e+0], [-1.1086226999306070e-4, -1.0414157476193443e-3, -3.1626060364795575e-3, -7.1554974557479419e-3, -1.4638029785243267e-2, -2.9856294056236371e-2, -6.6665558824245710e-2, -1.9258524005910799e-1, -1.2392127666479464e+0], [1.6997749780096231e-6, 1.6189243516738305e-5, 5.0584114763391010e-5, 1.1972109783837732e-4, 2.6133279669888982e-4, 5.8320221291963804e-4, 1.4719777501796346e-3, 4.9843807241561452e-3, 3.5718739108218349e-2], [-2.3674984648290743e-8, -2.2681066884132520e-7, -7.1703322633338159e-7, -1.7269318546798564e-6, -3.8544104466658867e-6, -8.8013345079843876e-6, -2.2359500759067092e-5, -6.8557126219079365e-5, -1.5002823621081158e-4], [3.1990684649362709e-10, 3.0484309866346565e-9, 9.5165751095142357e-9, 2.2353955512524717e-8, 4.7440386780479539e-8, 9.6679810496028334e-8, 1.7498192619328503e-7, -1.2757257884387265e-7, -8.6656460025691734e-6], [-1.9790355387077430e-12, -1.8080069236940813e-11, -5.0768779580437121e-11, -9.3128708592824432e-11, -8.6947224458296096e-11, 3.3719626848712354e-10, 3.6901946837450910e-9, 2.8704632944928566e-8, -1.5269560302015769e-7], [1.0238004067421221e-13, 9.3930503950355171e-13, 2.6843903023513143e-12, 5.2795696081938219e-12, 7.4775589941777736e-12, 1.4649354414006656e-12, -5.0464156437634746e-11, -2.3423692143358476e-11, 4.0467515840715633e-9], [-8.1382235855798229e-16, -7.3629264405249516e-15, -2.0260860589013324e-14, -3.6368200990211082e-14, -4.0538739497780244e-14, -8.0542843528593894e-15, -6.2589374894855361e-13, -2.0314765601171686e-11, 2.4507529016458159e-10], [-9.1355966436849790e-17, -8.8425311598097886e-16, -2.8540678060785644e-15, -7.0800115878366928e-15, -1.6227731701057207e-14, -3.5835607923300645e-14, -6.1026928291331621e-14, -9.7394001028497522e-14, 9.2290102326662675e-13], [-3.1254403982651510e-18, -2.9125601103072067e-17, -8.6896085812153523e-17, -1.9092255283346204e-16, -3.7739246305288670e-16, -7.7688400564539760e-16, -1.9018279446459671e-15, 8.9636528420085363e-15, -2.4003136705002445e-13], [1.6490503991121131e-20, 1.6781573287039218e-19, 5.9955365491249826e-19, 1.7495376831782837e-18, 5.1628759148752097e-18, 1.7095047794852355e-17, 5.7229177727978529e-17, 8.4558994372073826e-17, -5.4182786019285267e-15], [3.9683646469983660e-21, 3.7826825807472686e-20, 1.1823224724137161e-19, 2.7879683196554911e-19, 5.9937519666724239e-19, 1.2971535083112086e-18, 3.3972896001320948e-18, 2.9081509820443674e-18, 1.5239626330485916e-16], [1.1713625985336433e-22, 1.0992216379733024e-21, 3.3286457182717311e-21, 7.4796205810125682e-21, 1.5020830555134563e-20, 2.8543399334890962e-20, 4.6047400739427997e-20, 2.4210786316549541e-19, 8.1011724716143076e-18], [2.3769182902441303e-26, -1.8215782264664407e-25, -3.2773812881837175e-24, -1.8326725436659993e-23, -7.4193568782333907e-23, -2.6480914114176926e-22, -1.0960387266523894e-21, -2.6311579515451032e-21, -2.0657141923920184e-20]],
        [[2.4720520428616065e-3, 2.2798797613788205e-2, 6.6635034783946724e-2, 1.4175122728124830e-1, 2.6464167481666411e-1, 4.7246318946728652e-1, 8.6490608597752796e-1, 1.8197782089704206e+0, 6.7044798975649961e+0], [-9.8315662418070666e-5, -9.2197968359610766e-4, -2.7898184602216531e-3, -6.2746417961272749e-3, -1.2719550825681412e-2, -2.5586329341504109e-2, -5.5910264090136232e-2, -1.5599317519419326e-1, -9.6320764226351347e-1], [1.4454743653147163e-6, 1.3751844882963035e-5, 4.2870091592015540e-5, 1.0110251875640796e-4, 2.1960445173297509e-4, 4.8708979380941132e-4, 1.2226571959242533e-3, 4.1677596050781448e-3, 3.3009085583836208e-2], [-1.8754516220243773e-8, -1.7984255704631700e-7, -5.6980221260406488e-7, -1.3781625840654730e-6, -3.1011019508197815e-6, -7.2012639812498775e-6, -1.9045686827878025e-5, -6.6231705388791781e-5, -3.0555331670187926e-4], [3.0095202579704004e-10, 2.8754030806478462e-9, 9.0354550554250190e-9, 2.1520721166345870e-8, 4.7057502087541027e-8, 1.0300490987454335e-7, 2.3392836445619022e-7, 3.9438375908033923e-7, -1.0213196121142004e-5], [-2.1494521355215053e-13, -2.0340371332621581e-12, -5.8963248193531292e-12, -9.4073369107114947e-12, 1.0571115374995130e-11, 2.2208511875341197e-10, 2.0083604314598354e-9, 2.1295268296519355e-8, 2.1071331132849405e-8], [2.5085088050452007e-14, 2.1165482615684454e-13, 4.7269518698522017e-13, 3.1920268345215294e-13, -2.3328536197055767e-12, -1.7334645967976358e-11, -1.0065322411961351e-10, -5.8048150937906650e-10, 9.8318400162614868e-9], [-4.9797483646056303e-15, -4.7054518225131117e-14, -1.4435468720647917e-13, -3.2992924037370691e-13, -6.7516323054271526e-13, -1.3399096679941087e-12, -2.9174080584106846e-12, -1.7219048698060024e-11, 1.1376661177432395e-10], [-1.3701575027870499e-16, -1.2905540972247814e-15, -3.9380100354423049e-15, -8.9518174846867189e-15, -1.8235915134432275e-14, -3.5141965331084781e-14, -4.9526283644409318e-14, 3.3654728512240193e-13, -9.1056259675596008e-12], [2.3182398885918992e-18, 2.2882678019757545e-17, 7.6727302531983522e-17, 2.0135744650004281e-16, 5.0072500147322240e-16, 1.2842545948727940e-15, 3.5442336326801281e-15, 1.6535292869610228e-14, -2.3065823815177891e-13], [2.6790715946524871e-19, 2.5405640781605786e-18, 7.8645804036892569e-18, 1.8327160539663850e-17, 3.9077489053036446e-17, 8.4349488703358432e-17, 1.9964643391000775e-16, 2.5914808711726892e-16, 7.2023543683799816e-15], [5.0748281651338536e-21, 4.7255982262186844e-20, 1.4048327213159560e-19, 3.0402876120701239e-19, 5.6497717007547992e-19, 9.0727346279561065e-19, 9.0278249555220043e-19, -3.1788464723794054e-18, 3.1722236062648490e-16], [-1.8895983057668050e-22, -1.8211883791829951e-21, -5.8300707193444364e-21, -1.4329660470334069e-20, -3.2996349991786249e-20, -7.9373978609291829e-20, -2.2660238635494881e-19, -7.5629773485980785e-19, -4.4582992338196791e-18], [-1.2830107778973734e-23, -1.2161636032979942e-22, -3.7616412181536436e-22, -8.7535200507385559e-22, -1.8600698322807722e-21, -3.9664238971643649e-21, -9.1224032786576089e-21, -2.8870250128395758e-20, -3.6265796965060691e-19]],
        [[2.2863293809559440e-3, 2.1058568631283311e-2, 6.1378432861727595e-2, 1.2996250726957476e-1, 2.4085057839707066e-1, 4.2493346546787795e-1, 7.6218938095590219e-1, 1.5387106647695624e+0, 5.0286406035938876e+0], [-8.7570605256557937e-5, -8.1981906465903936e-4, -2.4717632274909062e-3, -5.5261489082351379e-3, -1.1098807808752296e-2, -2.2007133612691864e-2, -4.6977515098773914e-2, -1.2569619552682589e-1, -7.1646147967931406e-1], [1.2491284027691838e-6, 1.1867934569397828e-5, 3.6893719466340408e-5, 8.6616005912291803e-5, 1.8688614235479548e-4, 4.1059775998348415e-4, 1.0173871559338699e-3, 3.4220642294937387e-3, 2.8418782901364280e-2], [-1.3995513755180235e-8, -1.3440031113667944e-7, -4.2713687725621615e-7, -1.0385047524493930e-6, -2.3568223608553652e-6, -5.5545180557330720e-6, -1.5141705735972737e-5, -5.7405702393217671e-5, -4.5235570084819020e-4], [2.8943776756540268e-10, 2.7606701423069335e-9, 8.6493060643270290e-9, 2.0541627860249926e-8, 4.4948759419755951e-8, 9.9858174951439908e-8, 2.4309088454223543e-7, 6.5074137490184392e-7, -7.3677137437384105e-6], [-1.6240943677671119e-12, -1.5910529855254498e-11, -5.2406169544392336e-11, -1.3289072709143687e-10, -3.1028989108697160e-10, -7.0496641748982112e-10, -1.3962126758528134e-9, 3.3954427202282495e-9, 2.5722026180038304e-7], [-1.4712938321373032e-13, -1.4084904331005178e-12, -4.4522041315799258e-12, -1.0767943245245738e-11, -2.4462976086344236e-11, -5.9007322326280482e-11, -1.7512634422430621e-10, -8.1356216078842906e-10, 8.2149810503339020e-9], [-5.7844605614810197e-15, -5.3983917902297854e-14, -1.6122921480056012e-13, -3.5161677789149932e-13, -6.6198728599478055e-13, -1.0917424838295970e-12, -1.0962566837896751e-12, 3.9973921786399367e-12, -2.3378246814944039e-10], [1.5088333016045597e-16, 1.4595876841964595e-15, 4.7052239896813638e-15, 1.1674979424746357e-14, 2.7177464352367678e-14, 6.6101651075080144e-14, 1.9133442964749759e-13, 9.6004201067475754e-13, -9.8607386587862720e-12], [1.2437984475730692e-17, 1.1777025902386468e-16, 3.6330067334698150e-16, 8.4077899654094507e-16, 1.7660169809844809e-15, 3.6656492028785541e-15, 7.7340194892761691e-15, 1.0194674955884299e-14, 2.1806638330075850e-13], [6.5210173389426764e-20, 5.6176896105886350e-19, 1.3637104248812531e-18, 1.6987975879234491e-18, -1.4156223044295367e-18, -2.0539919933630800e-17, -1.2074256777121810e-16, -9.1499623489518875e-16, 1.1370073897170885e-14], [-1.7612842333508229e-20, -1.6813355912769585e-19, -5.2776628367586209e-19, -1.2578618369749105e-18, -2.7713736044328706e-18, -6.2507607641260306e-18, -1.5811534575131507e-17, -4.4570033135394007e-17, -1.8968143635354454e-16], [-5.3274833407249636e-22, -5.0059063927284667e-21, -1.5185185883829961e-20, -3.4112683626815665e-20, -6.8045515314854344e-20, -1.2815791979782511e-19, -2.1479859081323203e-19, 9.1029934489899216e-20, -1.1804263684194259e-17], [1.3471760359638637e-23, 1.3069862194183647e-22, 4.2428042746075379e-22, 1.0672982899337988e-21, 2.5474686966390704e-21, 6.4635729825906465e-21, 1.9716577823855596e-20, 8.6370052022899089e-20, 1.6279612217930849e-19]],
        [[2.1207023953412208e-3, 1.9509272130645583e-2, 5.6715405758587900e-2, 1.1956742009918872e-1, 2.2006666802144965e-1, 3.8401104199047743e-1, 6.7584240731986765e-1, 1.3126376436993988e+0, 3.8047573096342921e+0], [-7.8174566232415697e-5, -7.3061401319531149e-4, -2.1948866627233290e-3, -4.8777873268401090e-3, -9.7053206183420958e-3, -1.8963407626592424e-2, -3.9502696491820202e-2, -1.0089943701349103e-1, -5.1238098531958492e-1], [1.1071593304865595e-6, 1.0502635575436880e-5, 3.2541885310390341e-5, 7.5986181671153037e-5, 1.6259980524405219e-4, 3.5280043812757969e-4, 8.5736963743003399e-4, 2.7947289781180665e-3, 2.2480310891812738e-2], [-9.8563380116867813e-9, -9.4982459265031524e-8, -3.0401907048792030e-7, -7.4739151748419878e-7, -1.7230255048699772e-6, -4.1512280344369728e-6, -1.1699305648931381e-5, -4.7409762418175677e-5, -5.2111923680805395e-4], [2.1302759601259031e-10, 2.0251286894456849e-9, 6.3034441055775032e-9, 1.4830884967825479e-8, 3.2105154445496400e-8, 7.0806926909068091e-8, 1.7508493414387351e-7, 5.5064835141192672e-7, -9.2577320723331416e-7], [-6.1649577308977735e-12, -5.8916386456787270e-11, -1.8524662947614996e-10, -4.4184834913278616e-10, -9.6976492608425204e-10, -2.1470272223089900e-9, -5.0860849897144180e-9, -1.1311815479224224e-8, 3.5000042052576641e-7], [-1.8087270922783864e-13, -1.6955828234918537e-12, -5.1216823412194430e-12, -1.1454158160404536e-11, -2.2884673854647886e-11, -4.4608510958486609e-11, -9.2841153519172103e-11, -2.8541679452000153e-10, -1.0787607270477027e-9], [4.9185940722839440e-15, 4.7858482923513582e-14, 1.5616858025534899e-13, 3.9521977324234719e-13, 9.4747018274837864e-13, 2.4004203052615946e-12, 7.2024397220355153e-12, 3.0501569878699887e-11, -3.6047971266842025e-10], [4.2313491266441459e-16, 3.9921421454857820e-15, 1.2217437230032313e-14, 2.7874348993530632e-14, 5.7127236076355904e-14, 1.1360347798111197e-13, 2.2352981009598704e-13, 3.3911365145989500e-13, 2.9758167202163174e-12], [-3.2193542711981347e-18, -3.2794820235892914e-17, -1.1647263650946119e-16, -3.2986130668984314e-16, -8.9969394824766605e-16, -2.6128287503672138e-15, -9.0279905649352695e-15, -4.6594181575303787e-14, 3.8601887006253868e-13], [-7.6097811024065800e-19, -7.2270015759882438e-18, -2.2433698623067552e-17, -5.2446240340178525e-17, -1.1188084492515440e-16, -2.3824625323308358e-16, -5.3439598884341856e-16, -1.0745117330432049e-15, -4.5231696138808323e-15], [-4.8522045392368641e-21, -4.2341612496163577e-20, -1.0651324321643675e-19, -1.4978760628313945e-19, 2.5374486086923498e-20, 1.3090030952536165e-18, 8.6696710070917562e-18, 6.5165499284908771e-17, -3.9499529815704391e-16], [1.2132574192585585e-21, 1.1594303273354872e-20, 3.6472054199345741e-20, 8.7193734031308310e-20, 1.9275520539155023e-19, 4.3520559078578829e-19, 1.0895091279874522e-18, 3.0237260094289251e-18, 4.8811635225265007e-18], [2.5182737020776344e-23, 2.3450474255150815e-22, 6.9654587723002743e-22, 1.5006841184733507e-21, 2.7414612871379346e-21, 4.0705120258911504e-21, 3.7836758233758439e-22, -7.7455371319449071e-20, 3.5681151543334866e-19]],
        [[1.9728699574274516e-3, 1.8128778542576590e-2, 5.2575418321014750e-2, 1.1039369294273126e-1, 2.0189645562774277e-1, 3.4876017287946384e-1, 6.0327965516404238e-1, 1.1314887864468754e+0, 2.9401928741788283e+0], [-6.9743022102529030e-5, -6.5070196010427023e-4, -1.9477446691452558e-3, -4.3024821775141313e-3, -8.4801050537792817e-3, -1.6324507191695107e-2, -3.3165818017041158e-2, -8.0685652459460936e-2, -3.5729690469425652e-1], [1.0046881846659134e-6, 9.5130124833800757e-6, 2.9360638728571248e-5, 6.8115310598422197e-5, 1.4430106575011988e-4, 3.0825432366849090e-4, 7.3024865437624094e-4, 2.2708025147191580e-3, 1.6355861437661742e-2], [-7.5991766626868632e-9, -7.3535728824759613e-8, -2.3730877420656795e-7, -5.9042917256608150e-7, -1.3822762152304692e-6, -3.3914602774294985e-6, -9.7547181425206824e-6, -4.0490446002088701e-5, -4.8443018543310419e-4], [6.4188057268440023e-11, 6.1138506096908711e-10, 1.9138445464131037e-9, 4.5660155502153296e-9, 1.0203654234454318e-8, 2.4147739594269421e-8, 6.9887653088882420e-8, 3.2432017377129002e-7, 5.1009260725865871e-6], [-7.6304705818283061e-12, -7.2077913639684266e-11, -2.2120939494546710e-10, -5.0751309242210371e-10, -1.0517684921501830e-9, -2.1435220787149841e-9, -4.4997729455951598e-9, -8.3606149674585127e-9, 2.2461205066083699e-7], [9.0053310405129330e-14, 8.8764308069956656e-13, 2.9654847834634205e-12, 7.7281156749350673e-12, 1.9031811714260991e-11, 4.8648621577948267e-11, 1.3906509616179275e-10, 4.5029225018476131e-10, -8.1649287453686398e-9], [1.1398952781299445e-14, 1.0761611765876746e-13, 3.2986196810180369e-13, 7.5501851261800458e-13, 1.5582322331392688e-12, 3.1538105395674178e-12, 6.5727786150490301e-12, 1.3424398086475886e-11, -1.0528484666419708e-10], [-1.2881706599158902e-16, -1.2892488873244311e-15, -4.4359149950361600e-15, -1.2062303942182099e-14, -3.1426914662903703e-14, -8.6710775348535840e-14, -2.7959422154872524e-13, -1.2115855219305511e-12, 1.0477244505490453e-11], [-2.0528456489916421e-17, -1.9404992815273351e-16, -5.9623217025653706e-16, -1.3690425708313385e-15, -2.8323711259875703e-15, -5.7081146131644345e-15, -1.1406384674628174e-14, -1.5065089889151576e-14, -1.8538341299340179e-14], [2.2470488492545187e-19, 2.2555519861753949e-18, 7.8062135261460676e-18, 2.1414679618562062e-17, 5.6467679969519644e-17, 1.5827559124062622e-16, 5.2078361446330413e-16, 2.3251234359780744e-15, -1.1692698846367388e-14], [3.6041668102035808e-20, 3.4141046400766737e-19, 1.0536471357620363e-18, 2.4366832424350483e-18, 5.0944545369113844e-18, 1.0413907480717555e-17, 2.1053864567876559e-17, 2.1915492144697069e-17, 1.3236525302220349e-16], [-3.7555739271270607e-22, -3.7922000701327276e-21, -1.3276856565099790e-20, -3.7043011584672562e-20, -9.9897812071447389e-20, -2.8826685244019394e-19, -9.8356959777003937e-19, -4.4979566027400879e-18, 1.2175344717070934e-17], [-6.3177805855157426e-23, -5.9996096578657274e-22, -1.8612910864004629e-21, -4.3410203133784612e-21, -9.1898431312695710e-21, -1.9114180903122570e-20, -3.9418829205441068e-20, -3.6423163904922127e-20, -1.9625423433763025e-19]],
        [[1.8411381012774880e-3, 1.6900737014226762e-2, 4.8905966343433240e-2, 1.0231164298256149e-1, 1.8603917222888369e-1, 3.1845113903035992e-1, 5.4242911924761931e-1, 9.8680175398454131e-1, 2.3391970266362594e+0], [-6.2063175635586640e-5, -5.7805882545242665e-4, -1.7240272854306019e-3, -3.7853335362913077e-3, -7.3906460216806713e-3, -1.4017421108846318e-2, -2.7778482398358824e-2, -6.4383140671922304e-2, -2.4804529667527657e-1], [9.1526389382398147e-7, 8.6478936508442101e-6, 2.6570594016448416e-5, 6.1182844707737427e-5, 1.2811294770122586e-4, 2.6873002957692047e-4, 6.1763870123610324e-4, 1.8125939679878177e-3, 1.1144970591211343e-2], [-7.5830774800255507e-9, -7.3259428553536561e-8, -2.3557951491942856e-7, -5.8258471689851900e-7, -1.3506760597067045e-6, -3.2621051405394814e-6, -9.1339657983594616e-6, -3.6003064363387865e-5, -3.7788146489923648e-4], [-4.5820819962470878e-11, -4.2026533138237359e-10, -1.2035553711781101e-9, -2.4002950427912151e-9, -3.6321401118592844e-9, -2.1072066466629507e-9, 2.1955538051818912e-8, 2.7314458170184083e-7, 7.5776090467573849e-6], [-2.6608330761019617e-12, -2.4497962290349598e-11, -7.1058374440273812e-11, -1.4738075034131668e-10, -2.5522197050265969e-10, -3.5988926534803875e-10, -1.7362704884189596e-10, 2.6954909931882046e-9, 2.7761599958329203e-8], [2.6744818987553879e-13, 2.5352697665529872e-12, 7.8369516846790713e-12, 1.8180242338360741e-11, 3.8253552465481811e-11, 7.9472849929500612e-11, 1.7043714682307999e-10, 3.2295611437238930e-10, -7.0556157980369299e-9], [-4.2089222617400829e-16, -5.5241720678010425e-15, -2.7111944599343837e-14, -1.0153663709847684e-13, -3.4093039452534845e-13, -1.1331903758521919e-12, -4.1019955571530654e-12, -1.7732450341702844e-11, 1.4852811972704668e-10], [-4.3957585439611918e-16, -4.1535189908014251e-15, -1.2750641837614211e-14, -2.9232407684284185e-14, -6.0335433085689814e-14, -1.2126457243143683e-13, -2.4317267877326491e-13, -3.6756642859157642e-13, 3.9513122389619025e-12], [6.3641830018796732e-18, 6.3047824922651391e-17, 2.1281444116600262e-16, 5.6367710808858937e-16, 1.4217120514318011e-15, 3.7669922019640923e-15, 1.1450200162817888e-14, 4.3802189285919388e-14, -2.5580960637920139e-13], [6.7517983756947209e-19, 6.3494376070163325e-18, 1.9285783320961957e-17, 4.3363063894924529e-17, 8.6356136104850629e-17, 1.6107529447308331e-16, 2.5916160214111161e-16, -1.6509726482483599e-16, 9.4338130275122279e-16], [-1.9810891541006619e-20, -1.9230430190841946e-19, -6.2420793690703571e-19, -1.5644720842722289e-18, -3.6838101759895402e-18, -8.9956063332278476e-18, -2.4686132454720037e-17, -7.8766507792022521e-17, 2.8318354648894130e-16], [-8.9792625415844846e-22, -8.3773105810638831e-21, -2.4986899840689628e-20, -5.4257890486014869e-20, -1.0079665680815548e-19, -1.5829851247689470e-19, -9.4416495994937368e-20, 1.7219587919894588e-18, -6.3471430314644122e-18], [4.5564501079759663e-23, 4.3908065616746018e-22, 1.4043835051045666e-21, 3.4410277188595517e-21, 7.8477354366035666e-21, 1.8310122781100232e-20, 4.6566026292103546e-20, 1.1800214873308365e-19, -2.4816200388921216e-19]],
        [[1.7240355944493929e-3, 1.5810926211363906e-2, 4.5661261509594528e-2, 9.5207782053138990e-2, 1.7223069132215934e-1, 2.9244178799293241e-1, 4.9147097838225309e-1, 8.7122444245191039e-1, 1.9193564623033593e+0], [-5.5119416206881290e-5, -5.1252342201263395e-4, -1.5231435397612559e-3, -3.3245691310808470e-3, -6.4316561064345112e-3, -1.2024687936878756e-2, -2.3268891349061377e-2, -5.1530282311188003e-2, -1.7497260567382341e-1], [8.1917078790419151e-7, 7.7222673209286153e-6, 2.3611881479617173e-5, 5.3934407493755355e-5, 1.1153263464737385e-4, 2.2943625973058295e-4, 5.1061069239657731e-4, 1.4094411596362039e-3, 7.3306205512597477e-3], [-8.4216520639489261e-9, -8.0879919712347204e-8, -2.5694326317349763e-7, -6.2340390312014752e-7, -1.4061421369990213e-6, -3.2665632633334650e-6, -8.6378991022601577e-6, -3.0955949762566199e-5, -2.5982974652526786e-4], [-4.2604970090383445e-11, -3.7819337885764703e-10, -9.9919598121646634e-10, -1.6502567863324480e-9, -1.1966134028562487e-9, 5.5619966136629259e-9, 4.7255133472919506e-8, 3.6305612324815676e-7, 6.8166420566669249e-6], [2.3740913339345966e-12, 2.2832931782708988e-11, 7.2653933543935304e-11, 1.7604519194189429e-10, 3.9268763199739759e-10, 8.7822042683600798e-10, 2.0620175483433473e-9, 4.4383864278013481e-9, -8.5142277899830579e-8], [1.1829204996325150e-13, 1.0947729700489738e-12, 3.2109177626841276e-12, 6.7860432760901412e-12, 1.2118461649439661e-11, 1.8079230771235049e-11, 1.1455190559247881e-11, -1.3990715287563933e-10, -2.3494555894619291e-9], [-7.7116565285419647e-15, -7.3276641285078009e-14, -2.2761144080703622e-13, -5.3198868215208499e-13, -1.1310899110410391e-12, -2.3822929382648273e-12, -5.2022836476757597e-12, -1.0328868282285409e-11, 1.5280959437857345e-10], [1.4655886080983771e-17, 1.8817674672160105e-16, 9.0386772050450300e-16, 3.3373914592427935e-15, 1.1105515782321427e-14, 3.6661595921512940e-14, 1.3168479298134102e-13, 5.6344222303856675e-13, -2.5707567908050357e-12], [1.1887510903450308e-17, 1.1188050817868372e-16, 3.4045671525089776e-16, 7.6830854883626493e-16, 1.5418908304358326e-15, 2.9339117329750798e-15, 5.1223570002839580e-15, 2.2606194095508135e-15, -7.9070578293907931e-14], [-3.1831742067996742e-19, -3.0842670476812924e-18, -9.9701871349572160e-18, -2.4802272189128652e-17, -5.7651363423805970e-17, -1.3765954317738323e-16, -3.6269459542013560e-16, -1.0664920829385265e-15, 5.2078165990225916e-15], [-1.1131977874945305e-20, -1.0260375610907461e-19, -2.9773275013109633e-19, -6.1361928048308741e-19, -1.0257314121674363e-18, -1.1879215483115176e-18, 1.4749750693316970e-18, 2.8621282117838473e-17, -6.6037190993980135e-17], [7.8197142834450066e-22, 7.4620253277800033e-21, 2.3378726084205358e-20, 5.5358321395113496e-20, 1.1972208918369274e-19, 2.5680342188789802e-19, 5.6297984730273920e-19, 9.5486602291182269e-19, -4.1500353051860414e-18], [-1.5558267008847652e-24, -2.0950249383052144e-23, -1.0586329354711917e-22, -4.0737484255172246e-22, -1.4065667405573362e-21, -4.8223376794493243e-21, -1.8013540494204843e-20, -7.7866124109277501e-20, 1.9839961971934939e-19]],
        [[1.5921997375445814e-3, 1.4586402074827552e-2, 4.2030563014462117e-2, 8.7313249632486177e-2, 1.5704771010395180e-1, 2.6431189712360123e-1, 4.3783232350002794e-1, 7.5561313850996971e-1, 1.5528601235569040e+0], [-7.5737984784480415e-5, -7.0281970536594285e-4, -2.0797584376785252e-3, -4.5075031066523785e-3, -8.6254198678359184e-3, -1.5856360353286483e-2, -2.9851697010267885e-2, -6.2824307128308299e-2, -1.8704081934032919e-1], [1.7541826598485948e-6, 1.6488226124033915e-5, 5.0104001688029968e-5, 1.1328351740826769e-4, 2.3059326725755800e-4, 4.6293513728935368e-4, 9.9018781922693290e-4, 2.5396939605127804e-3, 1.0937150873375131e-2], [-3.4791163729012805e-8, -3.3184114344983707e-7, -1.0393536520016909e-6, -2.4653952206698280e-6, -5.3800120434889783e-6, -1.1915977912649044e-5, -2.9337796514165258e-5, -9.3261712192631079e-5, -5.9434354380386779e-4], [2.1874198034589174e-10, 2.2338031840876199e-9, 7.9562836735638298e-9, 2.2530547583964639e-8, 6.1005369315436870e-8, 1.7352977521200757e-7, 5.7124830867880965e-7, 2.5953103749196273e-6, 2.7931070273789922e-5], [2.6597447273097329e-11, 2.4880809131662544e-10, 7.4699338963574735e-10, 1.6451183965277265e-9, 3.1593529452077272e-9, 5.4905638753786033e-9, 7.1556736814555592e-9, -1.9043896066082479e-8, -9.9348461774744377e-7], [-1.0897998063445121e-12, -1.0505526551990276e-11, -3.3597397315365566e-11, -8.2125402093492718e-11, -1.8589549761865233e-10, -4.2666302203175026e-10, -1.0588543192225056e-9, -2.8450751974305137e-9, 1.5901344779928031e-8], [-4.3935951502442001e-14, -3.9934123256978030e-13, -1.1225644662969266e-12, -2.1756357767152946e-12, -3.1791965963857140e-12, -2.0077255716203554e-12, 1.3351836704782176e-11, 1.2940264970667773e-10, 9.4087623231738769e-10], [6.5586677339884182e-15, 6.1884998076371699e-14, 1.8936897537755785e-13, 4.3156707396696824e-13, 8.8109076483954343e-13, 1.7337434648546787e-12, 3.3103591856832931e-12, 3.9198871184354115e-12, -9.1625621732102725e-11], [-2.2411573555723111e-16, -2.1721373602759696e-15, -7.0228657473345303e-15, -1.7456679915392906e-14, -4.0446640529498985e-14, -9.5797530904955465e-14, -2.4813787030210525e-13, -7.0984864185378378e-13, 3.4107062454408510e-12], [-1.0366502332969035e-17, -9.4502579222635024e-17, -2.6740229603397030e-16, -5.2462641055216035e-16, -7.8677146636220257e-16, -5.7256519347406776e-16, 2.9106939625799699e-15, 2.8997571614248245e-14, 1.2863367849334864e-14], [1.3715189064366230e-18, 1.2971380769113939e-17, 3.9879754699636773e-17, 9.1529702480776712e-17, 1.8858637992211963e-16, 3.7470788632820302e-16, 7.1725866347315751e-16, 7.8463481108244889e-16, -9.1550218208034958e-15], [-4.0456741132482406e-20, -3.9620668805394155e-19, -1.3070809100084214e-18, -3.3437356262317109e-18, -8.0290947073998457e-18, -1.9800076720722829e-17, -5.3349762663269709e-17, -1.5424847830901306e-16, 5.1327220268167375e-16], [-2.5200713774422909e-21, -2.3062994040154950e-20, -6.5817058663339802e-20, -1.3113494965500949e-19, -2.0280142830811844e-19, -1.6894865567599583e-19, 6.5141711541766345e-19, 6.9448262201207838e-18, -6.7873239262748327e-18]],
        [[1.4534975501177701e-3, 1.3300676816930756e-2, 3.8234470447397912e-2, 7.9116352044170910e-2, 1.4145107478167928e-1, 2.3588652923538017e-1, 3.8504751204404531e-1, 6.4720604074627223e-1, 1.2481583222596026e+0], [-6.3284516168784212e-5, -5.8595152969285509e-4, -1.7258146607800632e-3, -3.7116564903455268e-3, -7.0190707609656124e-3, -1.2672685981767071e-2, -2.3179939341523580e-2, -4.6324095275534249e-2, -1.2182512321864656e-1], [1.3702931854165890e-6, 1.2837512882628964e-5, 3.8740128371221561e-5, 8.6594739543737951e-5, 1.7320747558678086e-4, 3.3855937415246402e-4, 6.9388948705243235e-4, 1.6485989119639096e-3, 5.9110363609445378e-3], [-2.8553709637102843e-8, -2.7077575993132009e-7, -8.3790738446253800e-7, -1.9491005014400217e-6, -4.1308077782584325e-6, -8.7616834675322343e-6, -2.0181677823037204e-5, -5.7229113609567133e-5, -2.8129231162665941e-4], [4.7726100171756538e-10, 4.6060570771075816e-9, 1.4772718124853617e-8, 3.6327296952620795e-8, 8.3257658621417909e-8, 1.9641604087482580e-7, 5.2313789579549687e-7, 1.8276611101036215e-6, 1.2751105919628916e-5], [1.2601672166874531e-12, 8.4247400854647934e-12, 2.9421344473838408e-12, -8.2603245590272751e-11, -4.7105168796584663e-10, -1.9882319627406049e-9, -8.4196671969843868e-9, -4.5281247977845825e-8, -5.2268701235461993e-7], [-6.7897056746062219e-13, -6.3543062861457726e-12, -1.9099748032679261e-11, -4.2177863694664732e-11, -8.1538032773548607e-11, -1.4448933864196617e-10, -2.0779457990827669e-10, 2.5421614628405563e-10, 1.7585186602254060e-8], [3.4878504644504929e-14, 3.3227476869935247e-13, 1.0375163735865287e-12, 2.4444688617293683e-12, 5.2557501044335710e-12, 1.1243758155785532e-11, 2.5218228853981138e-11, 5.6198883672047984e-11, -3.6371628012318521e-10], [-4.3159416360429835e-16, -4.4012147333146629e-15, -1.5614755412427385e-14, -4.3841409092407393e-14, -1.1671762755654959e-13, -3.2114891524372373e-13, -9.8386893569075706e-13, -3.6468923018521103e-12, -5.7527575081630478e-12], [-6.9957333743316660e-17, -6.4645727046062600e-16, -1.8892818536112049e-15, -3.9647873777935908e-15, -6.9777520585442393e-15, -1.0023224519327862e-14, -4.5528323235006375e-15, 8.5541911361549584e-14, 1.0322394885868500e-12], [5.9725814113226060e-18, 5.6381557842469170e-17, 1.7269283477062093e-16, 3.9414031783006601e-16, 8.0639912774714579e-16, 1.5924825160801185e-15, 3.0730793990339373e-15, 4.1364065798058078e-15, -5.6183672687422381e-14], [-2.0184450338762837e-19, -1.9476693643125426e-18, -6.2402439839122806e-18, -1.5289979546760828e-17, -3.4687230747222740e-17, -7.9649777424845284e-17, -1.9649454480781367e-16, -5.1398919505439972e-16, 1.6336194802495875e-15], [-3.3583590933689418e-21, -2.8790586242693654e-20, -6.9191372594051374e-20, -8.5111560741357198e-20, 6.4061104576186125e-20, 9.1293373596010624e-19, 4.7966120653918928e-18, 2.3865447266520604e-17, 5.2035802526034867e-18], [7.7731655151947861e-22, 7.2658387627303053e-21, 2.1777821029729849e-20, 4.7828714335523929e-20, 9.1487132774637205e-20, 1.5855324069527793e-19, 2.1533982131477507e-19, -2.4741796695992724e-19, -3.5777671211655121e-18]],
        [[1.3368959959687037e-3, 1.2222051821324699e-2, 3.5063685536301711e-2, 7.2318459783048626e-2, 1.2865683081592981e-1, 2.1295190751977719e-1, 3.4356332099367826e-1, 5.6587996010852790e-1, 1.0431148545164915e+0], [-5.3565299475090740e-5, -4.9502288107194568e-4, -1.4522090866832431e-3, -3.1029565901099144e-3, -5.8102380065218218e-3, -1.0335151225424418e-2, -1.8468865822014618e-2, -3.5450016122257086e-2, -8.5233640586821866e-2], [1.0722302897722050e-6, 1.0016704230327808e-5, 3.0048220046631390e-5, 6.6514997077230069e-5, 1.3109053253083783e-4, 2.5059185397622189e-4, 4.9600506765574496e-4, 1.1094736243819282e-3, 3.4792821558851913e-3], [-2.1314341290022620e-8, -2.0129518839254000e-7, -6.1755765423756242e-7, -1.4165282336469703e-6, -2.9392659296043308e-6, -6.0405547518785498e-6, -1.3249886953039089e-5, -3.4561095391845406e-5, -1.4149624183764520e-4], [4.0530184798728524e-10, 3.8731092470111050e-9, 1.2174251657605285e-8, 2.9014487150002611e-8, 6.3614119283663991e-8, 1.4118118274940290e-7, 3.4502310887537918e-7, 1.0560186046263344e-6, 5.6853580218768341e-6], [-5.9790534325333538e-12, -5.8346101163215284e-11, -1.9125807148788721e-10, -4.8562721305298460e-10, -1.1602557715195234e-9, -2.8788862338864821e-9, -8.1294784036853120e-9, -3.0267262011581675e-8, -2.2152268321408790e-7], [-4.3414157261963777e-14, -3.5269631549010785e-13, -7.0371264533729606e-13, -1.3364786848037821e-13, 4.7070442100402123e-12, 2.6702773434646739e-11, 1.2631307553728126e-10, 7.1328239367784231e-10, 8.0794925997835769e-9], [1.0376465110216739e-14, 9.6750387349555048e-14, 2.8846269708185850e-13, 6.2795665670283783e-13, 1.1838613961803105e-12, 1.9943719329587952e-12, 2.4234848354882949e-12, -6.7506466900501034e-12, -2.5840678892415435e-10], [-6.0105997875275963e-16, -5.6832243659698617e-15, -1.7470485089933809e-14, -4.0138048674741361e-14, -8.3104423457596269e-14, -1.6795071770520398e-13, -3.4242819665815723e-13, -5.9585947694277149e-13, 6.2046080798054977e-12], [1.9929496967412291e-17, 1.9119781391724919e-16, 6.0570119398363389e-16, 1.4601950949636236e-15, 3.2471041486216774e-15, 7.3015678087100261e-15, 1.7780684810828690e-14, 4.8707441682815629e-14, -3.8405103909000359e-14], [-6.4431768974197826e-20, -8.1473877221389977e-19, -3.8387139802820778e-18, -1.3892922094820200e-17, -4.5172517615653503e-17, -1.4469382227281379e-16, -4.9862484179741485e-16, -2.0542916343090641e-15, -6.7260264604098255e-15], [-4.0406023166462914e-20, -3.7343760147990012e-19, -1.0920113625598181e-18, -2.2960367084279305e-18, -4.0662180294746818e-18, -5.9902098292999671e-18, -3.8527490260494296e-18, 3.9530387724611410e-17, 4.9029164670066152e-16], [2.9289179652263231e-21, 2.7561886633053356e-20, 8.3855709017986460e-20, 1.8925918301509202e-19, 3.8049409776666721e-19, 7.3067075402443320e-19, 1.3414516808131841e-18, 1.5570413482300544e-18, -2.0759945916122064e-17], [-1.1019405663649024e-22, -1.0529535747502726e-21, -3.3072254203215840e-21, -7.8577398990752126e-21, -1.7066978561192954e-20, -3.6892296169787373e-20, -8.3352715556167473e-20, -1.8690254999844407e-19, 5.4795665198467839e-19]],
        [[1.2376051103544806e-3, 1.1305175817209026e-2, 3.2378334044852568e-2, 6.6595934918018056e-2, 1.1798448698431010e-1, 1.9408120005688528e-1, 3.1014893592011476e-1, 5.0271837434606775e-1, 8.9601118315872236e-1], [-4.5909400079848130e-5, -4.2358626882885378e-4, -1.2384415221582277e-3, -2.6316562610516802e-3, -4.8869808654729913e-3, -8.5860520628437690e-3, -1.5054213934678346e-2, -2.7986305375346614e-2, -6.2923719067802197e-2], [8.5143071769265169e-7, 7.9347743325120062e-6, 2.3682340622711390e-5, 5.1992254853690285e-5, 1.0120088686542634e-4, 1.8990280080354007e-4, 3.6532000269101481e-4, 7.7892131377853939e-4, 2.2092343268156438e-3], [-1.5775217208658217e-8, -1.4849420213641220e-7, -4.5244294187201648e-7, -1.0262432747735009e-6, -2.0938567263802950e-6, -4.1967236458894238e-6, -8.8584721086695478e-6, -2.1664545810630843e-5, -7.7523004095726306e-5], [2.9017754542682263e-10, 2.7593430001992244e-9, 8.5850338846991918e-9, 2.0126936742523307e-8, 4.3068641083113728e-8, 9.2264924555956780e-8, 2.1386935196466038e-7, 6.0052749697864820e-7, 2.7142591033163646e-6], [-5.1139799445050077e-12, -4.9186497736575500e-11, -1.5664661028891242e-10, -3.8093116170818741e-10, -8.5879114311910080e-10, -1.9769831466220353e-9, -5.0625580386006405e-9, -1.6424303467915752e-8, -9.4360676761572025e-8], [7.1031954895697210e-14, 6.9846651816971918e-13, 2.3238557062996267e-12, 6.0284261879841192e-12, 1.4801096256385910e-11, 3.7933019558607618e-11, 1.1110830518815027e-10, 4.2980163525618233e-10, 3.2203559368771331e-9], [4.0153872096777536e-16, 3.0298298241313493e-15, 4.2535739338448826e-15, -1.0031177700505451e-14, -8.7685598102511500e-14, -4.0951051339664080e-13, -1.8112614090574519e-12, -9.8461767550553566e-12, -1.0546982041260961e-10], [-1.0812602512041681e-16, -1.0023056405264038e-15, -2.9495596042095372e-15, -6.2668468335675268e-15, -1.1277158478298382e-14, -1.7001869559958844e-14, -1.0907690411621990e-14, 1.3808490406528561e-13, 3.1778114495608923e-12], [6.6732566180469206e-18, 6.2737529949426878e-17, 1.9053276798671898e-16, 4.2899352197544671e-16, 8.6032955685840996e-16, 1.6496336477982687e-15, 3.0310132717816984e-15, 3.3709397307646804e-15, -8.0745902015714826e-14], [-2.8068970429348117e-19, -2.6612136406305976e-18, -8.2288086067902034e-18, -1.9098333576609967e-17, -4.0218827155688097e-17, -8.3761804783724616e-17, -1.8203481566117443e-16, -4.0169209786407868e-16, 1.3024932260341320e-15], [7.6297528377476454e-21, 7.3373192688262507e-20, 2.3355956089222556e-19, 5.6716745654321805e-19, 1.2739979376369452e-18, 2.9049687198988434e-18, 7.2304265321544583e-18, 2.0875912788138097e-17, 1.7800109078581663e-17], [-1.7821553448775146e-23, -2.4569055959363874e-22, -1.2543409773161759e-21, -4.7667133690787251e-21, -1.5903333890392278e-20, -5.1511186362022269e-20, -1.7769335739044858e-19, -7.2830325084670791e-19, -2.7246626993245912e-18], [-1.2383625024943173e-23, -1.1393566176383142e-22, -3.2985784995239193e-22, -6.8105000666327711e-22, -1.1658006907635173e-21, -1.5832247424003598e-21, -4.2879660771271922e-22, 1.3995328038526094e-20, 1.4325542522376595e-19]],
        [[1.1520492657819223e-3, 1.0516322903629913e-2, 3.0075220450511114e-2, 6.1713077056145289e-2, 1.0894804972464244e-1, 1.7828476580007373e-1, 2.8266297724989847e-1, 4.5225475836231499e-1, 7.8533291476133086e-1], [-3.9783409644011520e-5, -3.6655414826289445e-4, -1.0685836986729249e-3, -2.2600329441467771e-3, -4.1673503210335226e-3, -7.2458819580561667e-3, -1.2505527112053045e-2, -2.2653239673919105e-2, -4.8353069249997963e-2], [6.8690837973947912e-7, 6.3881959017312880e-6, 1.8983405628535878e-5, 4.1382639780789202e-5, 7.9701483312793191e-5, 1.4724281326018652e-4, 2.7663102707396864e-4, 5.6733983678066744e-4, 1.4885383205080914e-3], [-1.1858995267611554e-8, -1.1131943502653122e-7, -3.3720439594450985e-7, -7.5766358780737091e-7, -1.5241558870607975e-6, -2.9918230855120298e-6, -6.1187371518925704e-6, -1.4207651757465251e-5, -4.5821336406367043e-5], [2.0454463339955458e-10, 1.9380369196845523e-9, 5.9844601105471588e-9, 1.3860180641331120e-8, 2.9124303174122903e-8, 6.0748743091405113e-8, 1.3525911519958298e-7, 3.5562974022481503e-7, 1.4100560767744331e-6], [-3.5056635638430951e-12, -3.3532653992319974e-11, -1.0558822386695775e-10, -2.5219205939073370e-10, -5.5389150112573599e-10, -1.2285942912674440e-9, -2.9806537964613518e-9, -8.8820949340348556e-9, -4.3337601776100382e-8], [5.7982710535471730e-14, 5.6062912485424983e-13, 1.8046283495928627e-12, 4.4608514635264325e-12, 1.0285626891400934e-11, 2.4382751860057845e-11, 6.4794211363574252e-11, 2.1995539946754516e-10, 1.3267174896832327e-9], [-7.9441181977236706e-16, -7.8394024257256754e-15, -2.6267589906072126e-14, -6.8865373203111394e-14, -1.7147386688848014e-13, -4.4728613573606317e-13, -1.3381234262725755e-12, -5.2969142622035920e-12, -4.0189451137243337e-11], [-3.9171002019027138e-19, 4.6929634378602200e-18, 7.0054384790072360e-17, 3.8013389611850017e-16, 1.5349099283541829e-15, 5.7306245644028149e-15, 2.2883468743262005e-14, 1.1739713292787669e-13, 1.1881065328974113e-12], [8.1901072574112939e-19, 7.5241956980851372e-18, 2.1685274445362263e-17, 4.4204938177640469e-17, 7.2693349162021085e-17, 8.2057854307854219e-17, -1.0289773017710558e-16, -1.9995902067163314e-15, -3.3385303234199038e-14], [-5.3286994795474288e-20, -4.9837219065376562e-19, -1.4966469809207001e-18, -3.3049691252858930e-18, -6.4144620485842323e-18, -1.1576656407061678e-17, -1.8281320775182695e-17, 4.6438704461286691e-19, 8.4764869665227847e-16], [2.4551774102728019e-21, 2.3127533814767967e-20, 7.0551622726921116e-20, 1.6016935784599282e-19, 3.2614490755304667e-19, 6.4485384764109265e-19, 1.2805257963937635e-18, 2.2087599899011461e-18, -1.7247727530776893e-17], [-8.7336728517365999e-23, -8.2823543110147524e-22, -2.5625059776533653e-21, -5.9546417056580135e-21, -1.2572514742842736e-20, -2.6342491076902994e-20, -5.8195599193503137e-20, -1.3735594109095083e-19, 1.5500842566424597e-19], [2.1594553992581734e-24, 2.0742287691285190e-23, 6.5865724753196699e-23, 1.5933757643813584e-22, 3.5600474358755196e-22, 8.0617967501816157e-22, 1.9915155467037484e-21, 5.7509170391738072e-21, 8.7875770736782017e-21]],
        [[1.0775631185573696e-3, 9.8304313101540663e-3, 2.8078158644853552e-2, 5.7497711432465501e-2, 1.0119813011604292e-1, 1.6486780596841219e-1, 2.5965575299830366e-1, 4.1100752581924873e-1, 6.9902726140024307e-1], [-3.4806612403927936e-5, -3.2031134926491503e-4, -9.3142089741127635e-4, -1.9619183588791415e-3, -3.5957385341596622e-3, -6.1967037714406105e-3, -1.0553426912540214e-2, -1.8711616513440349e-2, -3.8316913511807194e-2], [5.6214771122258193e-7, 5.2184524639595697e-6, 1.5448737089702434e-5, 3.3471945346421888e-5, 6.3881244811603081e-5, 1.1645422820735603e-4, 2.1446612836380777e-4, 4.2593417549427464e-4, 1.0501626444132996e-3], [-9.0789279484362611e-9, -8.5017162652684282e-8, -2.5623327805234202e-7, -5.7105328998902378e-7, -1.1348918025364387e-6, -2.1884963310119637e-6, -4.3583311885755562e-6, -9.6955029844366386e-6, -2.8781922793962557e-5], [1.4661368894399175e-10, 1.3849306912450414e-9, 4.2494830543054208e-9, 9.7416504257185345e-9, 2.0160380257896144e-8, 4.1124751401196573e-8, 8.8563180062861280e-8, 2.2068618305500420e-7, 7.8879967499116033e-7], [-2.3657923540908777e-12, -2.2543430012309781e-11, -7.0424497836179192e-11, -1.6607334453111884e-10, -3.5792015120544568e-10, -7.7239975888627148e-10, -1.7989178213230383e-9, -5.0217287770371946e-9, -2.1614166151402793e-8], [3.7988904618824860e-14, 3.6522469026966653e-13, 1.1619744281434258e-12, 2.8200039693070722e-12, 6.3329148320372158e-12, 1.4467585340158260e-11, 3.6466205104949882e-11, 1.1411955398827998e-10, 5.9186939812372107e-10], [-5.9424599141651479e-16, -5.7704025439764959e-15, -1.8736651583209991e-14, -4.6936286424353812e-14, -1.1022661285345064e-13, -2.6761860856855536e-13, -7.3289307281741515e-13, -2.5804525058287459e-12, -1.6173610293925438e-11], [8.1531467696449867e-18, 8.0545574805932306e-17, 2.7055199513782702e-16, 7.1237010372412932e-16, 1.7858932156093204e-15, 4.7050844705312721e-15, 1.4267895929478767e-14, 5.7398079715730373e-14, 4.3944670634801512e-13], [-3.8483934765251219e-20, -4.4262573493262526e-19, -1.8851322471310934e-18, -6.4162436220403513e-18, -2.0489795326149063e-17, -6.7140571280929104e-17, -2.4845371737481345e-16, -1.2161718748308867e-15, -1.1777468522309564e-14], [-4.5879866669071586e-21, -4.1451712416798728e-20, -1.1468319876820400e-19, -2.1348673780951632e-19, -2.7201518182234431e-19, 4.7606636084100705e-20, 2.6526711363500859e-18, 2.2359792220664169e-17, 3.0645928091051846e-16], [3.2608279442504681e-22, 3.0323029969454714e-21, 8.9911090510255464e-21, 1.9399870565281120e-20, 3.6077820738544862e-20, 5.9351190800319921e-20, 6.6810572303402738e-20, -2.3409193980581235e-19, -7.5143360822249841e-18], [-1.5708518345856723e-23, -1.4724957054296837e-22, -4.4452737031964266e-22, -9.9160335690695491e-22, -1.9628071408370062e-21, -3.6981998965072794e-21, -6.6372141031601912e-21, -7.0861841437424331e-21, 1.6342265802522680e-19], [6.1398160280230208e-25, 5.7840485358459151e-24, 1.7649753336357899e-23, 4.0107843223172455e-23, 8.1894171094279832e-23, 1.6316942271444283e-22, 3.3188328296566683e-22, 6.4590068509054752e-22, -2.6710668040696352e-21]],
        [[1.0121280423009064e-3, 9.2285706920441550e-3, 2.6329920918534445e-2, 5.3821668044773080e-2, 9.4478120153533777e-2, 1.5333006156910805e-1, 2.4011438873765307e-1, 3.7666121971774457e-1, 6.2983356698141216e-1], [-3.0708640510088196e-5, -2.8229927638256086e-4, -8.1907235714073077e-4, -1.7191342062717083e-3, -3.1341749141354926e-3, -5.3599948180788372e-3, -9.0252652246638612e-3, -1.5716275241188558e-2, -3.1111093872891845e-2], [4.6586029866998197e-7, 4.3177258547239234e-6, 1.2739868971430465e-5, 2.7455691592137605e-5, 5.1985855413595228e-5, 9.3685290362321618e-5, 1.6961792203881488e-4, 3.2788256286939177e-4, 7.6837767310968069e-4], [-7.0672496074080582e-9, -6.6038923567598156e-8, -1.9815602492188412e-7, -4.3848488871216173e-7, -8.6227701341359156e-7, -1.6374879438502928e-6, -3.1877422018728209e-6, -6.8404824541941679e-6, -1.8977279345298465e-5], [1.0721142459832709e-10, 1.0100453595473631e-9, 3.0820927242404781e-9, 7.0028232605109357e-9, 1.4302270037916068e-8, 2.8620795070962534e-8, 5.9908980251914192e-8, 1.4270951012395814e-7, 4.6869631603139780e-7], [-1.6262853319454848e-12, -1.5447123852078192e-11, -4.7934874807122016e-11, -1.1183083573906146e-10, -2.3721171146876536e-10, -5.0022114755445806e-10, -1.1258532948423932e-9, -2.9771801038055033e-9, -1.1575518791020393e-8], [2.4655083966097180e-14, 2.3611093080981109e-13, 7.4513367043069429e-13, 1.7850415694063124e-12, 3.9327199585325101e-12, 8.7397689753452113e-12, 2.1152604251033873e-11, 6.2099048879552099e-11, 2.8585858156110052e-10], [-3.7252294511671361e-16, -3.5973126204121740e-15, -1.1548359639951878e-14, -2.8418046993962417e-14, -6.5057841821029678e-14, -1.5244020635036265e-13, -3.9693991102650027e-13, -1.2943402754497241e-12, -7.0569960882203366e-12], [5.5313923097204299e-18, 5.3905201598793932e-17, 1.7630921279801000e-16, 4.4662877173114943e-16, 1.0651801886638664e-15, 2.6387228745542046e-15, 7.4116309469127542e-15, 2.6904224504607127e-14, 1.7403331081647097e-13], [-7.5579454591693591e-20, -7.4691516730353368e-19, -2.5115056445785956e-18, -6.6286036567088421e-18, -1.6693147881428158e-17, -4.4311341897537961e-17, -1.3586637928115738e-16, -5.5418676806355767e-16, -4.2792269520081811e-15], [6.3767430653801583e-22, 6.6844102844603065e-21, 2.4936983065467784e-20, 7.4916133199852834e-20, 2.1684889559975426e-19, 6.6241232490671283e-19, 2.3395277025841975e-18, 1.1112113156590988e-17, 1.0445238136146509e-16], [1.7768680794964058e-23, 1.5356897153788246e-22, 3.7598527725782345e-22, 4.8176740569526533e-22, -3.2683256247849936e-22, -5.4337061713466606e-21, -3.2129494998370521e-20, -2.0654917194983898e-19, -2.5081748190997611e-18], [-1.5783862439468856e-24, -1.4561789750688174e-23, -4.2395912373789078e-23, -8.8272919447426677e-23, -1.5240718862758661e-22, -2.0386755114137918e-22, 2.1363678261622526e-23, 3.0420988202382226e-21, 5.8227255213133853e-20], [7.8876471877693212e-26, 7.3595604369827733e-25, 2.1993970785670335e-24, 4.8196616911744429e-24, 9.2498363547745511e-24, 1.6411341407457808e-23, 2.4997873789970568e-23, -6.9193566191262567e-24, -1.2639133426356673e-21]],
        [[9.5418816487375448e-4, 8.6961840818091091e-3, 2.4786712627081782e-2, 5.0587623997744363e-2, 8.8595418256206619e-2, 1.4330236630751751e-1, 2.2331014437097046e-1, 3.4761650636002833e-1, 5.7311700112704015e-1], [-2.7294103921714489e-5, -2.5067424166107021e-4, -7.2589361632046042e-4, -1.5187872745909372e-3, -2.7561172102230742e-3, -4.6820199211553008e-3, -7.8065873093766292e-3, -1.3386794923865615e-2, -2.5762962622323697e-2], [3.9036750465560898e-7, 3.6129395709366395e-6, 1.0629113024114587e-5, 2.2799200610226416e-5, 4.2870061422356004e-5, 7.6486212388645072e-5, 1.3645328414198898e-4, 2.5776433843047723e-4, 5.7905300222945887e-4], [-5.5831390984177289e-9, -5.2072887155797559e-8, -1.5563993667948471e-7, -3.4224905937044245e-7, -6.6682289451564910e-7, -1.2494907001427663e-6, -2.3851008143581962e-6, -4.9632829419272636e-6, -1.3014899333868657e-5], [7.9851467772017325e-11, 7.5052003186439060e-10, 2.2790022110971524e-9, 5.1376510328756413e-9, 1.0372098077366638e-8, 2.0411862883667886e-8, 4.1689747178006531e-8, 9.5568560767865926e-8, 2.9252512122039641e-7], [-1.1420476250568647e-12, -1.0817075096692298e-11, -3.3370714954664705e-11, -7.7123052263531148e-11, -1.6133190518980388e-10, -3.3344953627463080e-10, -7.2870210255731530e-10, -1.8401775395706120e-9, -6.5748320952005096e-9], [1.6332815796541885e-14, 1.5589552859102558e-13, 4.8861179522209945e-13, 1.1576666899117947e-12, 2.5093210923534678e-12, 5.4470701754059269e-12, 1.2736776183447489e-11, 3.5432079106422418e-11, 1.4777530409283478e-10], [-2.3349443150361856e-16, -2.2459599578865951e-15, -7.1518501122584474e-15, -1.7372216470474252e-14, -3.9019774135354571e-14, -8.8963330947320453e-14, -2.2259111227298081e-13, -6.8217391470506436e-13, -3.3212433044091087e-12], [3.3309777432551320e-18, 3.2291671366804734e-17, 1.0448899145935602e-16, 2.6027516917846762e-16, 6.0596657259092724e-16, 1.4515577694180319e-15, 3.8874870209681018e-15, 1.3128926075194507e-14, 7.4633145291321393e-14], [-4.7015630762426070e-20, -4.5961297226412892e-19, -1.5128170015950164e-18, -3.8698053020852768e-18, -9.3541854439856466e-18, -2.3582484447849373e-17, -6.7709264546459556e-17, -2.5231733898765033e-16, -1.6762680382703860e-15], [6.3186939047330486e-22, 6.2474601654071737e-21, 2.1033886567221975e-20, 5.5661297506085576e-20, 1.4083984369701528e-19, 3.7669357321964542e-19, 1.1675946338123053e-18, 4.8262956284778744e-18, 3.7594638655517153e-17], [-6.6898089707179928e-24, -6.8218461304773885e-23, -2.4316735777209930e-22, -6.9434452960130802e-22, -1.9190466200605525e-21, -5.6527911117023512e-21, -1.9470341302123795e-20, -9.1016801935642770e-20, -8.4002471382594041e-19], [-2.6041590945417993e-26, -1.4933989891687524e-25, 1.9157636403392189e-25, 3.0665600143740426e-24, 1.5647046025255831e-23, 6.6016150540279814e-23, 2.9062034168176978e-22, 1.6498629558564221e-21, 1.8608092486128231e-20], [6.0289988906438455e-27, 5.4828276972986318e-26, 1.5416122659776070e-25, 2.9766832319843647e-25, 4.2295231028445050e-25, 1.6439968324500166e-25, -2.7112839966276914e-24, -2.6796446789854492e-23, -4.0450114694219895e-22]],
        [[9.0252500584170952e-4, 8.2218943783294867e-3, 2.3414450528378140e-2, 4.7720352455449838e-2, 8.3402647198620791e-2, 1.3450634719056907e-1, 2.0870529857370084e-1, 3.2273310304962860e-1, 5.2577921384021127e-1], [-2.4419042723161081e-5, -2.2408130168815672e-4, -6.4775843694701607e-4, -1.3515323603728525e-3, -2.4425686695151526e-3, -4.1250182979227766e-3, -6.8191155700844854e-3, -1.1539449148991100e-2, -2.1684568191526889e-2], [3.3034522229401768e-7, 3.0535803211980670e-6, 8.9600862514139855e-6, 1.9139000726862657e-5, 3.5767100350796720e-5, 6.3252687732540309e-5, 1.1140190848974946e-4, 2.0629877345878559e-4, 4.4716535491672460e-4], [-4.4689698384388801e-9, -4.1611471671691263e-8, -1.2393994536923778e-7, -2.7102669386470612e-7, -5.2374595574762044e-7, -9.6991145270993870e-7, -1.8199405835019186e-6, -3.6881469156375062e-6, -9.2211591340489796e-6], [6.0457027809109520e-11, 5.6704402579587892e-10, 1.7143930088902062e-9, 3.8379989657761132e-9, 7.6693332755020040e-9, 1.4872540885874986e-8, 2.9731838911277502e-8, 6.5935570020836498e-8, 1.9015286560843012e-7], [-8.1787307322000792e-13, -7.7271659008226999e-12, -2.3714241486936810e-11, -5.4349733552655631e-11, -1.1230377095029972e-10, -2.2805420312237042e-10, -4.8572022469117433e-10, -1.1787757840732279e-9, -3.9212105098517103e-9], [1.1064273137010387e-14, 1.0529836172526802e-13, 3.2802438275589611e-13, 7.6964099814762041e-13, 1.6444834046687253e-12, 3.4969520297614294e-12, 7.9350482882595777e-12, 2.1073754616142507e-11, 8.0860611470842939e-11], [-1.4967331720456778e-16, -1.4348551096687681e-15, -4.5372125089452025e-15, -1.0898496071820851e-14, -2.4079868706383641e-14, -5.3620744886343693e-14, -1.2963036975724576e-13, -3.7674597288826651e-13, -1.6674463238650334e-12], [2.0242717290768157e-18, 1.9547960661090098e-17, 6.2746118435694311e-17, 1.5430166383503684e-16, 3.5254744766471998e-16, 8.2210869424129605e-16, 2.1175397646756577e-15, 6.7349769313638922e-15, 3.4384147983674301e-14], [-2.7343760432324832e-20, -2.6600254505290651e-19, -8.6681189039817622e-19, -2.1826434780266509e-18, -5.1578535631050502e-18, -1.2597879977365953e-17, -3.4578635292218643e-17, -1.2037680186800835e-16, -7.0897954055680577e-16], [3.6712913542943394e-22, 3.5990424677718370e-21, 1.1913892931055326e-20, 3.0743670614012110e-20, 7.5214855428598871e-20, 1.9260852980999288e-19, 5.6386883651571767e-19, 2.1500435784422298e-18, 1.4615310317249710e-17], [-4.7971462970298363e-24, -4.7472283525541322e-23, -1.6014807412165764e-22, -4.2529955182113374e-22, -1.0822311047889944e-21, -2.9186347789859865e-21, -9.1479787424282748e-21, -3.8312203039768687e-20, -3.0108304886749753e-19], [5.5587043186843195e-26, 5.6047973909423738e-25, 1.9593159888367826e-24, 5.4679662621843619e-24, 1.4788243134456114e-23, 4.2822140302201242e-23, 1.4588709130406055e-22, 6.7785589081284402e-22, 6.1912847314449003e-21], [-2.8959119047668041e-28, -3.3423385039627369e-27, -1.4366136116805212e-26, -4.9767670875385072e-26, -1.6355126334143646e-25, -5.5946933857756665e-25, -2.2027332628994254e-24, -1.1753285733153338e-23, -1.2671014516343036e-22]],
        [[8.5617070458286279e-4, 7.7966808348188803e-3, 2.2186211657128596e-2, 4.5160786978799738e-2, 7.8785112432105474e-2, 1.2672811971281226e-1, 1.9589438569236534e-1, 3.0117602641058526e-1, 4.8566996482774856e-1], [-2.1975503192980392e-5, -2.0150669000619246e-4, -5.8159401509861398e-4, -1.2104622686720565e-3, -2.1796434356198415e-3, -3.6618265651696313e-3, -6.0078470732490575e-3, -1.0049784929528768e-2, -1.8503485265928841e-2], [2.8202479832149957e-7, 2.6039892472776578e-6, 7.6230138705274446e-6, 1.6222247240119344e-5, 3.0150655115609848e-5, 5.2904492797530230e-5, 9.2126750665766029e-5, 1.6767300228369020e-4, 3.5248110010541464e-4], [-3.6193932010652270e-9, -3.3650297158362772e-8, -9.9915643810259182e-8, -2.1740562449717605e-7, -4.1706913562761674e-7, -7.6434132192565693e-7, -1.4127087595281210e-6, -2.7974962535030397e-6, -6.7145688567679502e-6], [4.6449841193047825e-11, 4.3484914379665344e-10, 1.3096048375944389e-9, 2.9136040586459776e-9, 5.7692498772927497e-9, 1.1042874125786486e-8, 2.1663045961040268e-8, 4.6674092811546359e-8, 1.2790880089540724e-7], [-5.9611861344171372e-13, -5.6193789080484724e-12, -1.7165127478759085e-11, -3.9047234021374242e-11, -7.9805097484839882e-11, -1.5954268315003402e-10, -3.3218987667680810e-10, -7.7872164958705239e-10, -2.4365914591973976e-9], [7.6503440028052650e-15, 7.2616924483575964e-14, 2.2498503980237668e-13, 5.2329896460096878e-13, 1.1039306465446112e-12, 2.3050033220819539e-12, 5.0939324520747585e-12, 1.2992375136577187e-11, 4.6415707135940919e-11], [-9.8181107309973495e-17, -9.3839591861009473e-16, -2.9488932980647690e-15, -7.0130737712974506e-15, -1.5270456918093007e-14, -3.3301629025571612e-14, -7.8112298084844886e-14, -2.1676765816207949e-13, -8.8419291451128768e-13], [1.2599864604117625e-18, 1.2126227635160364e-17, 3.8650624217304554e-17, 9.3985303085080726e-17, 2.1123041993289443e-16, 4.8112164146687392e-16, 1.1977949064449174e-15, 3.6165832663631204e-15, 1.6843338770646244e-14], [-1.6167751811086763e-20, -1.5668002206275610e-19, -5.0653217359809571e-19, -1.2594216600606261e-18, -2.9216513909764988e-18, -6.9505654362288942e-18, -1.8366626188380229e-17, -6.0338339208755734e-17, -3.2085264143093012e-16], [2.0732080559107117e-22, 2.0231416163356862e-21, 6.6345448475877470e-21, 1.6868449189226890e-20, 4.0396004546911215e-20, 1.0038525733675283e-19, 2.8158118104785389e-19, 1.0065849174261959e-18, 6.1118043773530730e-18], [-2.6499274140714620e-24, -2.6044708833625068e-23, -8.6666339231527019e-23, -2.2543481885080997e-22, -5.5759988017080858e-22, -1.4481842221334911e-21, -4.3140301342958924e-21, -1.6786731471272404e-20, -1.1640950948448858e-19], [3.3391662002008540e-26, 3.3085280312159784e-25, 1.1190938855382355e-24, 2.9849072196157088e-24, 7.6444932277291002e-24, 2.0799052139307529e-23, 6.5929443570048937e-23, 2.7964252943349819e-22, 2.2165305663494857e-21], [-3.9660026031242240e-28, -3.9775986823459494e-27, -1.3788274373528002e-26, -3.8102545194250028e-26, -1.0213311705887045e-25, -2.9394256131668139e-25, -9.9895653969229841e-25, -4.6413973549161256e-24, -4.2154128717966733e-23]],
        [[8.1434671887874073e-4, 7.4132988801352900e-3, 2.1080446309319750e-2, 4.2861901896304740e-2, 7.4652215387333205e-2, 1.1980062933469083e-1, 1.8456587417303827e-1, 2.8231978046099275e-1, 4.5125003109904362e-1], [-1.9881246939676026e-5, -1.8217967893441459e-4, -5.2507395730462441e-4, -1.0903824871968918e-3, -1.9570008984310394e-3, -3.2724997777331083e-3, -5.3332159131471938e-3, -8.8310683350911655e-3, -1.5974492730744544e-2], [2.4268777089216615e-7, 2.2385064971246791e-6, 6.5392984710534633e-6, 1.3869356185606318e-5, 2.5651298468408709e-5, 4.4696154163497289e-5, 7.7054309480735767e-5, 1.3811956039998850e-4, 2.8275279824678225e-4], [-2.9624577531980256e-9, -2.7505325329920594e-8, -8.1440764482740300e-8, -1.7641427963029145e-7, -3.3622320441104465e-7, -6.1046488393130496e-7, -1.1132807495825282e-6, -2.1602157565745524e-6, -5.0048002314112188e-6], [3.6162332799788358e-11, 3.3796771298307944e-10, 1.0142675315109905e-9, 2.2439396345656231e-9, 4.4070300495995024e-9, 8.3377950836736390e-9, 1.6084681512756408e-8, 3.3786178443999201e-8, 8.8586304039428911e-8], [-4.4142884686833072e-13, -4.1527294564859286e-12, -1.2631740742078613e-11, -2.8542276065895222e-11, -5.7764941739455347e-11, -1.1387850234815826e-10, -2.3239149605738135e-10, -5.2842214896165516e-10, -1.5680012973776398e-9], [5.3884638070811714e-15, 5.1026061995125318e-14, 1.5731635406544304e-13, 3.6304965219749641e-13, 7.5715127577416223e-13, 1.5553648100072014e-12, 3.3575925407325846e-12, 8.2646211390975404e-12, 2.7754042560241039e-11], [-6.5776252760597745e-17, -6.2697520754509340e-16, -1.9592256136401792e-15, -4.6178876707469409e-15, -9.9243233420948809e-15, -2.1243336671790441e-14, -4.8510495010926348e-14, -1.2926020971582904e-13, -4.9125396140583933e-13], [8.0292048261565665e-19, 7.7038525559082803e-18, 2.4400254748242199e-17, 5.8738129886691978e-17, 1.3008243523361006e-16, 2.9014347416764695e-16, 7.0087915170043830e-16, 2.0216528697517695e-15, 8.6953245247021225e-15], [-9.8010152600732583e-21, -9.4658777410481990e-20, -3.0387852974059953e-19, -7.4712485223940921e-19, -1.7050354457379688e-18, -3.9627859700264219e-18, -1.0126259042569688e-17, -3.1618948017171900e-17, -1.5390939668311097e-16], [1.1963030930606452e-22, 1.1630191674793572e-21, 3.7842639364229316e-21, 9.5026708007055930e-21, 2.2347651843981216e-20, 5.4122347385057255e-20, 1.4630100414919071e-19, 4.9452030995584063e-19, 2.7242245216082371e-18], [-1.4596973272818325e-24, -1.4284749330170159e-23, -4.7112728493812821e-23, -1.2083554578468146e-22, -2.9285381657240963e-22, -7.3908982714268267e-22, -2.1135460619177135e-21, -7.7339954123054913e-21, -4.8218632492825212e-20], [1.7781955341281563e-26, 1.7518505293179179e-25, 5.8575409941871949e-25, 1.5348709705912295e-24, 3.8345797779511904e-24, 1.0087464894718760e-23, 3.0523872041175438e-23, 1.2093733938164144e-22, 8.5342957984485585e-22], [-2.1509555990894405e-28, -2.1347368477886270e-27, -7.2420318893674068e-27, -1.9408373024756311e-26, -5.0043025591712842e-26, -1.3737404114582750e-25, -4.4024231004265082e-25, -1.8897363580628094e-24, -1.5098289474118374e-23]],
        [[7.7641968160393566e-4, 7.0658633559906292e-3, 2.0079700902367002e-2, 4.0785792078621697e-2, 7.0931439539021479e-2, 1.1359149582708298e-1, 1.7447644417707320e-1, 2.6568651021066609e-1, 4.2138845823401164e-1], [-1.8072734821231005e-5, -1.6550586294021814e-4, -4.7641079949879527e-4, -9.8732568382893077e-4, -1.7668123374915695e-3, -2.9421258296955335e-3, -4.7661707909385855e-3, -7.8213511696869907e-3, -1.3930774639293231e-2], [2.1033968590529537e-7, 1.9383470417922341e-6, 5.6516591303488285e-6, 1.1950387086624516e-5, 2.2004528994473593e-5, 3.8101903380769881e-5, 6.5098713226126809e-5, 1.1512352296519746e-4, 2.3027028654756805e-4], [-2.4480403162185885e-9, -2.2701245669941503e-8, -6.7045606353240595e-8, -1.4464502834182368e-7, -2.7405247631205045e-7, -4.9343744124861395e-7, -8.8915035771512735e-7, -1.6945186646618536e-6, -3.8062782752300185e-6], [2.8491539121389005e-11, 2.6586908528192375e-10, 7.9536172078698660e-10, 1.7507536845534221e-9, 3.4131500742755397e-9, 6.3902452848645990e-9, 1.2144454466726500e-8, 2.4941848815129252e-8, 6.2916299473995936e-8], [-3.3159903290354875e-13, -3.1137661573517774e-12, -9.4353724457066628e-12, -2.1190762645965933e-11, -4.2508623109941816e-11, -8.2756660484255109e-11, -1.6587495354286051e-10, -3.6712243732492808e-10, -1.0399819595479219e-9], [3.8593183033886133e-15, 3.6467345028880646e-14, 1.1193177985870950e-13, 2.5648863388378366e-13, 5.2941798539836197e-13, 1.0717373967685189e-12, 2.2656019882559845e-12, 5.4037246752820898e-12, 1.7190497291265482e-11], [-4.4916709770440018e-17, -4.2709284029984037e-16, -1.3278461688859926e-15, -3.1044856437925620e-15, -6.5935657153057747e-15, -1.3879499603609633e-14, -3.0944709980606847e-14, -7.9538151974129669e-14, -2.8415223314719337e-13], [5.2276345054811176e-19, 5.0019619230016887e-18, 1.5752230908569184e-17, 3.7576051485878937e-17, 8.2118677917033371e-17, 1.7974598663873544e-16, 4.2265809785051710e-16, 1.1707327428364565e-15, 4.6969258002778887e-15], [-6.0841806267056655e-21, -5.8581176753508236e-20, -1.8686846820597634e-19, -4.5481242965872559e-19, -1.0227354481571851e-18, -2.3277932504121183e-18, -5.7728708121660234e-18, -1.7232169334898274e-17, -7.7638348597823466e-17], [7.0810310253943740e-23, 6.8607790903180802e-22, 2.2168067879394275e-21, 5.5049284678066534e-21, 1.2737470966442121e-20, 3.0145919117149102e-20, 7.8848561096976348e-20, 2.5364233667889013e-19, 1.2833310959784009e-18], [-8.2409419073965000e-25, -8.0348078478704220e-24, -2.6297095836523724e-23, -6.6628661984569121e-23, -1.5863366921752345e-22, -3.9039762515636615e-22, -1.0769418815607698e-21, -3.7333761799793296e-21, -2.1212922144106598e-20], [9.5893614685623919e-27, 9.4083358514865653e-26, 3.1191016441886279e-25, 8.0634862733038502e-25, 1.9754744944076603e-24, 5.0554646966514680e-24, 1.4708757171562800e-23, 5.4950872775669772e-23, 3.5063875458605048e-22], [-1.1155206344170229e-28, -1.1013361053500410e-27, -3.6985109635202586e-27, -9.7563358529340161e-27, -2.4594372789283001e-26, -6.5448831077792771e-26, -2.0084122545610133e-25, -8.0860891103906952e-25, -5.7942280885310992e-24]],
        [[7.4186906140630278e-4, 6.7495438690019422e-3, 1.9169688659909856e-2, 3.8901563492851792e-2, 6.7564052480136437e-2, 1.0799445812213442e-1, 1.6543328137537416e-1, 2.5090485203675949e-1, 3.9523555475866260e-1], [-1.6500246898183801e-5, -1.5102087292591351e-4, -4.3421282950958591e-4, -8.9821951791411272e-4, -1.6030626668123571e-3, -2.6593747751968827e-3, -4.2849913052670950e-3, -6.9754314182623985e-3, -1.2255647899670771e-2], [1.8349474446671578e-7, 1.6895441011984560e-6, 4.9176797979254964e-6, 1.0369741340988899e-5, 1.9017582718880393e-5, 3.2743690361199800e-5, 5.5494125285928548e-5, 9.6962340656037831e-5, 1.9001441498908095e-4], [-2.0405949956185205e-9, -1.8901753211920194e-8, -5.5695209702203522e-8, -1.1971632026959797e-7, -2.2561092585894392e-7, -4.0315839214151835e-7, -7.1869409337302277e-7, -1.3478299680336034e-6, -2.9460276763182356e-6], [2.2692900269389748e-11, 2.1146312441957013e-10, 6.3077640497838182e-10, 1.3820978621937893e-9, 2.6764857878790408e-9, 4.9639086908370747e-9, 9.3076735093609234e-9, 1.8735579302617529e-8, 4.5675898168717695e-8], [-2.5236155324164145e-13, -2.3657410234652131e-12, -7.1438616570646457e-12, -1.5956007471346601e-11, -3.1751902729830841e-11, -6.1118384166337396e-11, -1.2054194817397705e-10, -2.6043487689696748e-10, -7.0816974676850927e-10], [2.8064439887111031e-15, 2.6466697703725652e-14, 8.0907844629575308e-14, 1.8420850025561434e-13, 3.7668174120083473e-13, 7.5252328668340393e-13, 1.5611163470735768e-12, 3.6201883061981252e-12, 1.0979628432712201e-11], [-3.1209697959589159e-17, -2.9609584466741647e-16, -9.1632224004206229e-16, -2.1266455030755248e-15, -4.4686813023449973e-15, -9.2654821352745158e-15, -2.0217727395085459e-14, -5.0322612407911929e-14, -1.7023071240315734e-13], [3.4707453338707570e-19, 3.3125684752965104e-18, 1.0377812492374092e-17, 2.4551641517235693e-17, 5.3013221171583735e-17, 1.1408173047733820e-16, 2.6183602539749397e-16, 6.9951204167893261e-16, 2.6392965468033538e-15], [-3.8597209009172235e-21, -3.7059315029629708e-20, -1.1753396452790327e-19, -2.8344313547875434e-19, -6.2891070228953451e-19, -1.4046371897131077e-18, -3.3909895614357701e-18, -9.7236026869284819e-18, -4.0920267058304275e-17], [4.2922880299705743e-23, 4.1460040570892461e-22, 1.3311309460276219e-21, 3.2722856302350841e-21, 7.4609418940699495e-21, 1.7294664286309306e-20, 4.3916067693578683e-20, 1.3516342258168234e-19, 6.3443730915109746e-19], [-4.7733200889925388e-25, -4.6383219102431121e-24, -1.5075687552673651e-23, -3.7777706247587479e-23, -8.8511079681982918e-23, -2.1294115864641971e-22, -5.6874831396097906e-22, -1.8788451374983821e-21, -9.8364616771355509e-21], [5.3082529550582453e-27, 5.1890706873362999e-26, 1.7073839192048067e-25, 4.3613209116401552e-25, 1.0500260987105338e-24, 2.6218383267227168e-24, 7.3657333369567362e-24, 2.6116941502230912e-23, 1.5250668663931240e-22], [-5.9126709611526216e-29, -5.8085694952672060e-28, -1.9351673647193551e-27, -5.0375953067319867e-27, -1.2460790511663587e-26, -3.2285090448697677e-26, -9.5389060659324748e-26, -3.6299028853850745e-25, -2.3639620070414762e-24]],
        [[7.1026310125373209e-4, 6.4603385729701501e-3, 1.8338602379082775e-2, 3.7183783467739569e-2, 6.4501978551980868e-2, 1.0292323367086062e-1, 1.5728161546784613e-1, 2.3768182463165545e-1, 3.7214053947845147e-1], [-1.5124426235502492e-5, -1.3835767117218920e-4, -3.9738340395879499e-4, -8.2065482687832350e-4, -1.4610685950860730e-3, -2.4155136062586464e-3, -3.8731748213181872e-3, -6.2596998516613915e-3, -1.0865508866675629e-2], [1.6103065789943013e-7, 1.4815667132590144e-6, 4.3054963098495690e-6, 9.0560223042256232e-6, 1.6547720608496227e-5, 2.8344941049362687e-5, 4.7689881464753897e-5, 8.2429193510303808e-5, 1.5862190544634663e-4], [-1.7145029093833734e-9, -1.5864967278217180e-8, -4.6648396207432875e-8, -9.9934268694420845e-8, -1.8741560680846664e-7, -3.3261484473120983e-7, -5.8719910642924061e-7, -1.0854469229791821e-6, -2.3156677884270901e-6], [1.8254413567134448e-11, 1.6988582727080326e-10, 5.0541742742814950e-10, 1.1027863805976271e-9, 2.1226252549460081e-9, 3.9030822023195184e-9, 7.2301037453012338e-9, 1.4293419266047641e-8, 3.3805654340550653e-8], [-1.9435581757026577e-13, -1.8191776762815588e-12, -5.4760033938156518e-12, -1.2169377102760812e-11, -2.4040356348429060e-11, -4.5800874252525055e-11, -8.9023296519781056e-11, -1.8821909205309147e-10, -4.9351736510046115e-10], [2.0693178493103840e-15, 1.9480185434098564e-14, 5.9330390171724836e-14, 1.3429050419367782e-13, 2.7227544382121959e-13, 5.3745219125536784e-13, 1.0961318955306360e-12, 2.4785130803056275e-12, 7.2046938420917783e-12], [-2.2032149151619465e-17, -2.0859843954234886e-16, -6.4282195326834905e-16, -1.4819114703501356e-15, -3.0837278878059112e-15, -6.3067542396853435e-15, -1.3496524834865684e-14, -3.2637640645778050e-14, -1.0517889952459880e-13], [2.3457759092666330e-19, 2.2337214962288469e-18, 6.9647285680674446e-18, 1.6353066943124576e-17, 3.4925579584671122e-17, 7.4006859909964399e-17, 1.6618089786013325e-16, 4.2978009485076418e-16, 1.5354713394691455e-15], [-2.4975614285064891e-21, -2.3919218720812740e-20, -7.5460154368747127e-20, -1.8045801170783396e-19, -3.9555893060776625e-19, -8.6843645596705555e-19, -2.0461630755900536e-18, -5.6594449253570162e-18, -2.2415829065670252e-17], [2.6591682757212378e-23, 2.5613264990715907e-22, 8.1758171555923180e-22, 1.9913752738805120e-21, 4.4800076681610525e-21, 1.0190702148043371e-20, 2.5194130859284063e-20, 7.4524895509506055e-20, 3.2724113981669235e-19], [-2.8312311169423306e-25, -2.7427280697872113e-24, -8.8581808612661789e-24, -2.1975054281506786e-23, -5.0739507391405607e-23, -1.1958318492143241e-22, -3.1021192167895967e-22, -9.8136122709795040e-22, -4.7772831265703865e-21], [3.0144791955442218e-27, 2.9370337446417781e-26, 9.5975916825601665e-26, 2.4249978656946513e-25, 5.7466787086079975e-25, 1.4032595865316453e-24, 3.8196083812614534e-24, 1.2922805833467998e-23, 6.9741966064576450e-23], [-3.2141239549610343e-29, -3.1469739312543306e-28, -1.0413809157030093e-27, -2.6791125021493456e-27, -6.5135822340042576e-27, -1.6473697762919116e-26, -4.7037183806783208e-26, -1.7016219946322612e-25, -1.0179538880118308e-24]],
        [[6.8124066348012096e-4, 6.1949037891053810e-3, 1.7576598754876676e-2, 3.5611324707773357e-2, 6.1705486158405160e-2, 9.8307032818995336e-2, 1.4989577577399590e-1, 2.2578317958223146e-1, 3.5159653343099365e-1], [-1.3913790783884819e-5, -1.2722305636679064e-4, -3.6504893248319472e-4, -7.5272096116215914e-4, -1.3371397969714361e-3, -2.2037232958200720e-3, -3.5180013642957220e-3, -5.6487464777283529e-3, -9.6991842433388573e-3], [1.4208897409965554e-7, 1.3063726752118777e-6, 3.7908563814186888e-6, 7.9551778826302384e-6, 1.4487713718476799e-5, 2.4700147208601872e-5, 4.1283130012439024e-5, 7.0661456776117556e-5, 1.3378143133014748e-4], [-1.4510263144157761e-9, -1.3414310387419041e-8, -3.9366207721219275e-8, -8.4074787882326318e-8, -1.5697225470660683e-7, -2.7684840164997538e-7, -4.8445030207233342e-7, -8.8392026326716724e-7, -1.8452553245428319e-6], [1.4818020739950793e-11, 1.3774302431795229e-10, 4.0879900329281871e-10, 8.8854957887139731e-10, 1.7007713726597869e-9, 3.1030194617404627e-9, 5.6849394681861495e-9, 1.1057159977465527e-8, 2.5451717618051552e-8], [-1.5132305766488625e-13, -1.4143955373248213e-12, -4.2451796799090206e-12, -9.3906910026053848e-12, -1.8427608544360428e-11, -3.4779791837532999e-11, -6.6711769233481751e-11, -1.3831653356984980e-10, -3.5105707112348830e-10], [1.5453256668284691e-15, 1.4523528475648260e-14, 4.4084135160667062e-14, 9.9246096788877442e-14, 1.9966043768307190e-13, 3.8982479329451586e-13, 7.8285093080866199e-13, 1.7302330343204112e-12, 4.8421512856319133e-12], [-1.5781014826162795e-17, -1.4913287960533918e-16, -4.5779239499677998e-16, -1.0488884923445036e-15, -2.1632915784877302e-15, -4.3693007185499093e-15, -9.1866185968162850e-15, -2.1643879265797401e-14, -6.6788083766240258e-14], [1.6115724619109586e-19, 1.5313507193442995e-18, 4.7539523265276340e-18, 1.1085242694032866e-17, 2.3438947183241728e-17, 4.8972741336898000e-17, 1.0780336066644195e-16, 2.7074821736442508e-16, 9.2121205431455980e-16], [-1.6457533484312701e-21, -1.5724466872720629e-20, -4.9367492697585620e-20, -1.1715507077669423e-19, -2.5395755727792545e-19, -5.4890462986421684e-19, -1.2650535610239404e-18, -3.3868511416281367e-18, -1.2706333242811352e-17], [1.6806591966380528e-23, 1.6146455197930084e-22, 5.1265750334076681e-22, 1.2381605854756494e-21, 2.7515929068314069e-21, 6.1523264605935475e-21, 1.4845182015824420e-20, 4.2366892613820334e-20, 1.7525921820548579e-19], [-1.7163047870880781e-25, -1.6579764830704710e-24, -5.3236989572334868e-24, -1.3085574969395511e-23, -2.9813102956239385e-23, -6.8957550728639604e-23, -1.7420560373899425e-22, -5.2997710175177670e-22, -2.4173609136390929e-21], [1.7526785691408647e-27, 1.7024907277041358e-26, 5.5285231695736528e-26, 1.3829805082827513e-25, 3.2302476379576672e-25, 7.7290810921797238e-25, 2.0442823233934879e-24, 6.6296183765247620e-24, 3.3342826479465388e-23], [-1.7982903129872178e-29, -1.7544935655204553e-28, -5.7574167959442810e-28, -1.4645484441465663e-27, -3.5055992551890238e-27, -8.6714689798306986e-27, -2.4000360527651579e-26, -8.2937623784108781e-26, -4.5984167192728189e-25]],
        [[6.5449735595460784e-4, 5.9504240168433924e-3, 1.6875406283555839e-2, 3.4166491059618584e-2, 5.9141452418703229e-2, 9.4087230057605688e-2, 1.4317265756571806e-1, 2.1501938234122522e-1, 3.3320285571110707e-1], [-1.2842915377183685e-5, -1.1738052926496991e-4, -3.3650656571594590e-4, -6.9288692228082844e-4, -1.2283365604850596e-3, -2.0186165771602470e-3, -3.2095388122058322e-3, -5.1230719873627000e-3, -8.7110776958523006e-3], [1.2600545585469138e-7, 1.1577484740182913e-6, 3.3550797790356951e-6, 7.0257768968733876e-6, 1.2755949035055415e-5, 2.1654441750975736e-5, 3.5974534391551930e-5, 6.1031397034825217e-5, 1.1386888395843651e-4], [-1.2362749764244199e-9, -1.1419113012056376e-8, -3.3451235341411346e-8, -7.1240399287884838e-8, -1.3246714379377972e-7, -2.3229515344913195e-7, -4.0322526082789611e-7, -7.2706989736054318e-7, -1.4884636765567570e-6], [1.2129441594145829e-11, 1.1262907696137037e-10, 3.3351968345387661e-10, 7.2236772746880505e-10, 1.3756361158749079e-9, 2.4919154664203848e-9, 4.5196029280063946e-9, 8.6616178119964720e-9, 1.9456800131961867e-8], [-1.1900536384818524e-13, -1.1108839157452105e-12, -3.3252995925525293e-12, -7.3247081558284472e-12, -1.4285615807081827e-11, -2.6731692846725304e-11, -5.0658558903040778e-11, -1.0318625952394697e-10, -2.5433410121961809e-10], [1.1675951044171731e-15, 1.0956878166413905e-14, 3.3154317207664960e-14, 7.4271520622958375e-14, 1.4835232706706643e-13, 2.8676069155674400e-13, 5.6781306477841850e-13, 1.2292627527153682e-12, 3.3245875274696654e-12], [-1.1455604048215851e-17, -1.0806995893272918e-16, -3.3055931320236423e-16, -7.5310287567651020e-16, -1.5405995263641532e-15, -3.0761873067146595e-15, -6.3644067955054703e-15, -1.4644264868061831e-14, -4.3458121324682792e-14], [1.1239415411447316e-19, 1.0659163902627468e-18, 3.2957837394192776e-18, 7.6363582782997043e-18, 1.5998717024210925e-17, 3.2999391564467818e-17, 7.1336283666594918e-17, 1.7445781469589730e-16, 5.6807296949328459e-16], [-1.1027306657465276e-21, -1.0513354148127455e-20, -3.2860034563095655e-20, -7.7431609462113255e-20, -1.6614242834641951e-19, -3.5399659872618493e-19, -7.9958203974914393e-19, -2.0783241345761608e-18, -7.4256983236192620e-18], [1.0819200846005446e-23, 1.0369538974691062e-22, 3.2762521974865314e-22, 7.8514573655792248e-22, 1.7253450042310643e-21, 3.7974515874296648e-21, 8.9622195807044156e-21, 2.4759172958051533e-20, 9.7066747679179736e-20], [-1.0615016935157886e-25, -1.0227687075902482e-24, -3.2665293654014503e-24, -7.9612674803159520e-24, -1.7917247124199151e-23, -4.0736654872172740e-23, -1.0045420039689551e-22, -2.9495718091503568e-22, -1.2688306173836081e-21], [1.0415138598957418e-27, 1.0088312469414212e-26, 3.2569439588025154e-26, 8.0728376558631701e-26, 1.8607019943629050e-25, 4.3700392333230353e-25, 1.1259641596826166e-24, 3.5138535576180114e-24, 1.6585836819873413e-23], [-1.0342353854499136e-29, -1.0023639961987968e-28, -3.2610594179714497e-28, -8.2173245740553379e-28, -1.9376677720528681e-27, -4.6955818439130412e-27, -1.2632705841794251e-26, -4.1874539959771812e-26, -2.1679959983268482e-25]],
        [[6.2977480592435376e-4, 5.7245115869991377e-3, 1.6228023515120124e-2, 3.2834348026054958e-2, 5.6782043696092749e-2, 9.0214858330491244e-2, 1.3702687351744230e-1, 2.0523542668778978e-1, 3.1663858720532111e-1], [-1.1891085230676125e-5, -1.0863762434627591e-4, -3.1118565779695715e-4, -6.3991430026327659e-4, -1.1322937441983984e-3, -1.8558917494157150e-3, -2.9399404911663093e-3, -4.6675112838477894e-3, -7.8666409671007357e-3], [1.1226068956161774e-7, 1.0308419543080521e-6, 2.9836200794354132e-6, 6.2357003610441279e-6, 1.1289564796335874e-5, 1.9089616994860316e-5, 3.1538521859724805e-5, 5.3074807640270201e-5, 9.7720307324924229e-5], [-1.0598244126901558e-9, -9.7814651337970951e-9, -2.8606680788028360e-8, -6.0764322623713901e-8, -1.1256290511513589e-7, -1.9635492055244443e-7, -3.3833282139045565e-7, -6.0351974205180007e-7, -1.2138927534145537e-6], [1.0005530788384437e-11, 9.2814480206047691e-11, 2.7427828071964335e-10, 5.9212320832243077e-10, 1.1223114297613470e-9, 2.0196976626370959e-9, 3.6295010444419346e-9, 6.8626924004131349e-9, 1.5079113616505494e-8], [-9.4459653088380655e-14, -8.8069912002791343e-13, -2.6297554697784428e-12, -5.7699959235161394e-12, -1.1190035865586306e-11, -2.0774517068301533e-11, -3.8935855461691577e-11, -7.8036464594468725e-11, -1.8731446152873564e-10], [8.9176938738078910e-16, 8.3567880603979415e-15, 2.5213858759376234e-14, 5.6226225369068419e-14, 1.1157054927234808e-13, 2.1368572504938274e-13, 4.1768849821803385e-13, 8.8736161423134282e-13, 2.3268415100602799e-12], [-8.4189663445559635e-18, -7.9295987810452126e-17, -2.4174820847176816e-16, -5.4790132630228355e-16, -1.1124171195211086e-15, -2.1979615189010710e-15, -4.4807974417125192e-15, -1.0090290974907452e-14, -2.8904289443284718e-14], [7.9481304599241948e-20, 7.5242469204498514e-19, 2.3178600648555483e-18, 5.3390719614041764e-18, 1.1091384383007695e-17, 2.2608130877490230e-17, 4.8068227397468527e-17, 1.1473785920576742e-16, 3.5905236545288154e-16], [-7.5036263627983799e-22, -7.1396161753208436e-21, -2.2223433688808224e-20, -5.2027049472508015e-20, -1.1058694205088933e-19, -2.3254619217973367e-19, -5.1565698186688074e-19, -1.3046973935548405e-18, -4.4601892528946716e-18], [7.0839814975077957e-24, 6.7746473090711255e-23, 2.1307628192653493e-22, 5.0698209294648163e-22, 1.1026100377837850e-21, 2.3919594146591894e-21, 5.5317646873856274e-21, 1.4835864120635916e-20, 5.5404977342617086e-20], [-6.6878070072604640e-26, -6.4283332055074457e-25, -2.0429554875245099e-24, -4.9403296023263486e-24, -1.0993600623123095e-23, -2.4603581331671268e-23, -5.9342584835419605e-23, -1.6870031015649664e-22, -6.8824690707365632e-22], [6.3140127509349857e-28, 6.1001134686543554e-27, 1.9588740436014344e-26, 4.8143547139553798e-26, 1.0961568813372181e-25, 2.5307756610036617e-25, 6.3661317344327971e-25, 1.9183243391847738e-24, 8.5495025191079878e-24], [-5.9072123254245298e-30, -5.8280621073671984e-29, -1.8931605215163362e-28, -4.7179516852968085e-28, -1.0979112516432221e-27, -2.6114395059228859e-27, -6.8418469781893512e-27, -2.1828908191615712e-26, -1.0621437347284263e-25]],
    ],
    [
        [[5.5546053122855847e-3, 5.1596971725403549e-2, 1.5301279744255919e-1, 3.3279126691856807e-1, 6.4003399585464972e-1, 1.1839852799369624e+0, 2.2398763977029373e+0, 4.6653768540647058e+0, 12.352836047909414e+0, 67.728185353714858e+0], [-3.2878457816833535e-4, -3.0617092600269387e-3, -9.1234607476986604e-3, -1.9978508202192013e-2, -3.8743850015301633e-2, -7.2329088746887792e-2, -1.3808974755798477e-1, -2.9000382742854878e-1, -7.7282119499316636e-1, -4.2536309588805806e+0], [7.2720514996405353e-6, 6.6019258426972183e-5, 1.8685513304584191e-4, 3.7821656969306498e-4, 6.5908585181338954e-4, 1.0749575962453829e-3, 1.7495002748978878e-3, 3.0904236155793176e-3, 7.0022158198764821e-3, 3.4421767688257273e-2], [-1.4224137769538069e-7, -1.2051784730652486e-6, -2.9455514586462478e-6, -4.6657483279595380e-6, -5.5170541891647761e-6, -4.7587670984332699e-6, -2.0857549848128090e-6, 2.0865868945852022e-6, 6.5681373424349075e-6, 9.6329884811667318e-6], [2.5895261365188836e-9, 1.9191536697630059e-8, 3.3571930040145628e-8, 2.1654747786293199e-8, -2.5277316619641947e-8, -8.5695922598416986e-8, -1.1358947490696596e-7, -7.0427401002232814e-8, 3.4803853278349502e-8, 1.3498401140687847e-7], [-4.4849911704299162e-11, -2.6280284729912925e-10, -1.6846755823614474e-10, 4.9443137267027288e-10, 1.0595219875970050e-9, 4.7791462143452437e-10, -1.1737805752977532e-9, -2.1149629858166030e-9, -7.6263965677307886e-10, 1.7242934799159951e-9], [7.4662772969973858e-13, 2.8743926737541076e-12, -3.4354709715782937e-12, -1.1543603500345762e-11, 6.5278336769653171e-14, 2.3051597450200468e-11, 1.4417008372464929e-11, -2.6335535646874417e-11, -3.0823094674204872e-11, 1.8524139454649232e-11], [-1.2008671604746423e-14, -1.7987604606649352e-14, 1.1196299874543174e-13, 3.7518607455954418e-14, -3.0182045782092137e-13, -7.9150154103405089e-14, 5.1825775506102808e-13, 5.8900813950977647e-14, -6.4096620364961810e-13, 1.2172070872997188e-13], [1.8689666700727425e-16, -1.8465483271233260e-16, -1.5371114481376619e-15, 2.8204916011757276e-15, 2.0854467168684429e-15, -7.6994513758283020e-15, 1.5639127822980924e-15, 9.3544155626376240e-15, -8.7840198093703872e-15, -1.1806425108964512e-15], [-2.8132088136795402e-18, 9.2690780562413387e-18, 2.7755037240484584e-18, -5.6609259231928140e-17, 8.6892516320983988e-17, 9.6100426271158562e-18, -1.6068720664337602e-16, 1.7609914409085539e-16, -5.0702785748657616e-17, -7.0793350912806069e-17], [4.0810876064434002e-20, -2.0447293478281035e-19, 3.9639338319483298e-19, -2.0975761178366274e-20, -1.4018513707529272e-18, 2.8530152948059985e-18, -2.5364489850522076e-18, 4.8821993760696441e-19, 1.3222148784350268e-18, -1.9201463728295437e-18], [-5.6707118792521646e-22, 3.1755457946520155e-21, -1.0157784202723624e-20, 2.0018991159823822e-20, -2.1463655697027189e-20, 2.6589096445426693e-21, 2.9630802423752780e-20, -5.2869606314405023e-20, 5.3413685198955114e-20, -4.1300971157421603e-20], [7.4523058064032733e-24, -3.2658538215479039e-23, 1.1355935424596572e-22, -3.2962173955881110e-22, 7.0769882251571487e-22, -1.1231299780876620e-21, 1.3607671584206958e-21, -1.3229504846982787e-21, 1.0736553069439438e-21, -7.7631639042219998e-22], [-9.0535847502386293e-26, 2.7124968139222612e-26, 6.3002934032830514e-25, -1.7670558655264585e-24, 2.7873557131760016e-24, -3.5523997807242407e-24, 5.1286047243399394e-24, -8.7400144562183327e-24, 1.2494554209184706e-23, -1.3128376449092521e-23]],
        [[4.9502633101151848e-3, 4.5959346734933651e-2, 1.3615504771903425e-1, 2.9568727764626884e-1, 5.6760553502299782e-1, 1.0477300748510273e+0, 1.9775907527474766e+0, 4.1101560999743496e+0, 10.863466707518553e+0, 59.496691377789208e+0], [-2.7679376967296443e-4, -2.5865596566025143e-3, -7.7611548717362521e-3, -1.7170185299334922e-2, -3.3741259803573375e-2, -6.3980242102789341e-2, -1.2422639528992794e-1, -2.6520287092693418e-1, -7.1648018421601074e-1, -3.9777549350956166e+0], [5.7870167810657511e-6, 5.3237706611366849e-5, 1.5460839691063536e-4, 3.2458537554870612e-4, 5.9114668760349957e-4, 1.0100351358551059e-3, 1.7128663915352464e-3, 3.1071976724949864e-3, 7.0837230125276737e-3, 3.4551541198291182e-2], [-1.0711460332312233e-7, -9.3659394349396665e-7, -2.4388672550777754e-6, -4.2546994047404564e-6, -5.7545873450306373e-6, -6.0246188895083894e-6, -4.0672308240996183e-6, 5.8825746615255558e-7, 6.9560928874477916e-6, 1.2093820923361927e-5], [1.8476159578192977e-9, 1.4582210464199294e-8, 2.9603998141851517e-8, 2.8902822320815093e-8, -4.7060246852027446e-9, -7.0924455304258689e-8, -1.3242533521300738e-7, -1.1871386367297020e-7, 1.0530241512585456e-8, 1.7415742702779097e-7], [-3.0373357310629592e-11, -2.0027081414429913e-10, -2.1867559614406199e-10, 2.3833862416372940e-10, 9.6968683447466006e-10, 9.7781250761166358e-10, -6.5394329811663782e-10, -2.6875410688485564e-9, -1.7507113042021555e-9, 2.2025151932597118e-9], [4.8088134718837337e-13, 2.3283742332671256e-12, -9.5687662137094568e-13, -9.5284406514753107e-12, -7.0660484573642998e-12, 1.7591734143700327e-11, 2.8640071799467705e-11, -1.9547653380549075e-11, -5.2875537365522963e-11, 2.0890276838409104e-11], [-7.3764583475358206e-15, -1.9889777799886088e-14, 6.6657975171505562e-14, 9.6444979988254678e-14, -1.9710448942969077e-13, -2.9869018448799438e-13, 4.5987031760964428e-13, 4.5773521946194717e-13, -9.3545647272438281e-13, 2.4014782338276492e-14], [1.0983867407858055e-16, 3.1407971203228064e-17, -1.2446200939294802e-15, 9.3669763780498534e-16, 4.0677108016558066e-15, -5.4143475902901760e-15, -5.5581521609081303e-15, 1.5308299336159759e-14, -8.9366792992921665e-15, -5.6704393839232258e-15], [-1.5894221361127813e-18, 3.4417936968558067e-18, 1.1322003779917623e-17, -4.4536548857895988e-17, 2.1845928419647092e-17, 1.1052497480858715e-16, -2.1709169097745535e-16, 1.2971554038318464e-16, 6.6506659720174423e-17, -1.9783964688602029e-16], [2.2293107660500276e-20, -9.7167264407678381e-20, 7.0151767660801027e-20, 5.1254960955612890e-19, -1.6198124833889196e-18, 1.8385236553414824e-18, 1.4884245015804473e-19, -3.2763842034234298e-18, 5.0110224932699866e-18, -4.8607867900123243e-18], [-3.0249381525491039e-22, 1.7718249723058346e-21, -4.8327428755976024e-21, 4.8354857626580790e-21, 9.7118108138094603e-21, -4.5008311327618246e-20, 8.7542212111145053e-20, -1.1573646824753702e-19, 1.1774228368108624e-19, -1.0086898491056167e-19], [3.9316910733997328e-24, -2.4272265865150459e-23, 9.5491747810301517e-23, -2.6001080712220197e-22, 4.8702592240005978e-22, -6.6073544994455606e-22, 7.4036699734331767e-22, -9.7381276495096306e-22, 1.4805126105653048e-21, -1.8590267747539095e-21], [-4.8694446744034704e-26, 2.1812832333311458e-25, -8.9370288610759994e-25, 3.2431166076405752e-24, -9.1292181418596742e-24, 1.9266816443091002e-23, -3.0135180326261585e-23, 2.8552165935312019e-23, -2.9123770941013883e-24, -3.1168094510563273e-23]],
        [[4.4392282276794350e-3, 4.1179149476411235e-2, 1.2178238967900882e-1, 2.6378765167829235e-1, 5.0463353993407000e-1, 9.2760838300220873e-1, 1.7426604226290361e+0, 3.6046047186885433e+0, 9.4874404118920725e+0, 51.818089158599600e+0], [-2.3517900011978167e-4, -2.2019337648109970e-3, -6.6336386919567054e-3, -1.4769580004584492e-2, -2.9288180695311442e-2, -5.6206814233515279e-2, -1.1075544233273792e-1, -2.4035356819125771e-1, -6.5947679890290059e-1, -3.7007112071811368e+0], [4.6608214605469911e-6, 4.3275618076079854e-5, 1.2803715569278215e-4, 2.7642332592164592e-4, 5.2224552921213549e-4, 9.3164211902223746e-4, 1.6510470561322625e-3, 3.1010182876279190e-3, 7.1668025752497156e-3, 3.4714927585437286e-2], [-8.1849115522970228e-8, -7.3247178329594185e-7, -2.0008805924078317e-6, -3.7655835871903874e-6, -5.6855546538849784e-6, -6.9831650682507904e-6, -6.2493946309561109e-6, -1.7612631807447881e-6, 6.7660703596737101e-6, 1.5259743463097118e-5], [1.3406793337739807e-9, 1.1091480215072924e-8, 2.5130396234186324e-8, 3.1613262243791388e-8, 1.2622386248847022e-8, -4.7907685310641940e-8, -1.3772133818480577e-7, -1.7581770873361085e-7, -3.9447439285108384e-8, 2.2313629413152882e-7], [-2.0960824001460706e-11, -1.5086813715047223e-10, -2.2335703357609488e-10, 4.4115279418483793e-11, 7.4889026059859032e-10, 1.2841559195934309e-9, 1.6085071315973974e-10, -2.9443782879681556e-9, -3.3624841616756626e-9, 2.6832761279326515e-9], [3.1603739175426509e-13, 1.7995995057201673e-12, 4.1505037942528506e-13, -6.6197221929535779e-12, -1.0727009470895216e-11, 7.4776237746601812e-12, 3.7905284188773921e-11, 5.8817995806959577e-13, -8.2371663433162636e-11, 1.7624931402693032e-11], [-4.6280711332676678e-15, -1.7518781202000733e-14, 3.3550963241826246e-14, 1.0494501698179928e-13, -6.5684209488490103e-14, -3.9836906337207505e-13, 1.6601247877020032e-13, 9.8652051805928121e-13, -1.1331278801720816e-12, -3.1944497832756871e-13], [6.5908838722458432e-17, 1.0131112464854937e-16, -8.2675011131398095e-16, -2.7514171102534585e-16, 3.8404678864975180e-15, -6.4560615313253756e-16, -1.2290514043559563e-14, 1.6318901283877593e-14, -1.5108844688030321e-15, -1.7651075848867867e-14], [-9.1632048653631158e-19, 8.1098249290970349e-19, 1.1051517243108295e-17, -2.2824717638300907e-17, -2.9299649341278685e-17, 1.3900620216341124e-16, -1.3026472524765424e-16, -1.0948577339483258e-16, 3.8903554072377566e-16, -5.1428550706902342e-16], [1.2367832673517797e-20, -4.0954818304098525e-20, -5.8791594306830763e-20, 5.1296552819167806e-19, -8.5469131941049508e-19, -4.5221467880069287e-19, 4.1084353687649014e-18, -8.6067903113340697e-18, 1.1456370676229964e-17, -1.1986118526382011e-17], [-1.6346567385606844e-22, 8.6586244513125227e-22, -1.4116103114290780e-21, -3.4355511806657296e-21, 2.1146116481512768e-20, -5.0266993752705445e-20, 7.5529973447542911e-20, -1.0293627073710199e-19, 1.6139415414109442e-19, -2.4312173537629232e-19], [2.0576021024318264e-24, -1.3955831247157321e-23, 4.7935182547644604e-23, -8.9103348561013801e-23, 3.4276829001082693e-24, 4.2628770862964473e-22, -1.3374860168052193e-21, 1.9752674810781345e-21, -3.3309729076403701e-22, -4.3965575346320682e-21], [-2.5752663595479858e-26, 1.6586668279267516e-25, -8.1165304075150613e-25, 2.8023490289294622e-24, -7.6824217727465414e-24, 1.7655790953730018e-23, -4.0562668331388210e-23, 8.0852559380414838e-23, -8.1175644351201835e-23, -6.7808759639025852e-23]],
        [[4.0032845030661307e-3, 3.7095640472287905e-2, 1.0946798037118794e-1, 2.3632286769047008e-1, 4.5002220702936217e-1, 8.2237464810063052e-1, 1.5340943611151807e+0, 3.1486021273301365e+0, 8.2260669302169402e+0, 44.695011647542374e+0], [-2.0148590677288121e-4, -1.8880854568851202e-3, -5.6988828503335762e-3, -1.2730326771414582e-2, -2.5378644501232748e-2, -4.9099903626855329e-2, -9.7883926959913525e-2, -2.1568220471072663e-1, -6.0183419873254112e-1, -3.4221944184771383e+0], [3.7947272357452712e-6, 3.5458328037817611e-5, 1.0629419732101985e-4, 2.3427501863060703e-4, 4.5567844075482515e-4, 8.4411379057042928e-4, 1.5631016424961410e-3, 3.0610918895731257e-3, 7.2416120057371914e-3, 3.4921299375135968e-2], [-6.3379996136211452e-8, -5.7696026417016163e-7, -1.6337200029435770e-6, -3.2603722862814034e-6, -5.3781519654030905e-6, -7.5382495421816534e-6, -8.3770338166807062e-6, -5.0342981871364551e-6, 5.4788149513282552e-6, 1.9277785664760136e-5], [9.8792911907802171e-10, 8.4682607235136285e-9, 2.0825004085546927e-8, 3.1136974872595500e-8, 2.4943656390100383e-8, -2.1326657427492413e-8, -1.2527403566893679e-7, -2.3204641375407525e-7, -1.2899699587079397e-7, 2.7989090322086182e-7], [-1.4720017846027222e-11, -1.1318040126073968e-10, -2.0476318230116361e-10, -8.1117525727321855e-11, 4.8209310159782982e-10, 1.3318327114013960e-9, 1.0788520576947191e-9, -2.5459788105834453e-9, -5.7091674202259813e-9, 2.9141048363451161e-9], [2.1162645583586595e-13, 1.3569746019973170e-12, 1.0401390429475493e-12, -3.9018179060348393e-12, -1.1040917323756928e-11, -3.2613137017410595e-12, 3.6599514461023881e-11, 3.4414968273018790e-11, -1.1196424774180878e-10, -2.8119670593774906e-12], [-2.9638152617170031e-15, -1.4061976116616624e-14, 1.2920101381897043e-14, 8.6601827005424768e-14, 3.5507729208549891e-14, -3.4630320693339665e-13, -2.6550382309893476e-13, 1.3726574607328112e-12, -8.5610391118039533e-13, -1.2982086221344814e-12], [4.0325966012619935e-17, 1.0861489072751415e-16, -4.8104190331412825e-16, -7.7196686195455675e-16, 2.3859963523735558e-15, 3.5748680007354566e-15, -1.3441250172755575e-14, 5.4562108281726488e-15, 2.2270025862304538e-14, -4.8033169849989625e-14], [-5.4057752413424096e-19, -2.3432876346877275e-19, 7.9995172069414897e-18, -6.1332378030477916e-18, -4.6011335482401857e-17, 8.5318549126878449e-17, 7.5331993889110315e-17, -5.0109695073255817e-16, 9.6456745440079663e-16, -1.2824444314876534e-15], [6.9461630216506447e-21, -1.4868337544356945e-20, -8.3307984198587155e-20, 3.1125289593100593e-19, -3.1596613361703596e-20, -1.9718732857309559e-18, 5.4316758110289475e-18, -9.5422315719565082e-18, 1.6097501364353253e-17, -2.8544593289693660e-17], [-9.0560784758498411e-23, 3.7522380661748144e-22, 4.8251857403757398e-23, -4.9239830887755682e-21, 1.4462902958196163e-20, -1.5323424341457137e-20, -2.3987492477104320e-20, 9.2110575058283141e-20, -1.2067960691187321e-20, -5.3062323076814849e-19], [1.1012955494474315e-24, -6.9448108503022306e-24, 1.6729901810175703e-23, 1.3097760757360894e-23, -2.2335273701750426e-22, 8.6331476451913297e-22, -2.3796752525834819e-21, 5.8282514402953387e-21, -8.0586196772343490e-21, -6.6925364095153625e-21], [-1.1530226944641781e-26, 1.1420450610619432e-25, -3.6969763473235661e-25, 1.2161185647637248e-24, -1.0196869027261863e-24, -1.0735351115886478e-24, 8.0449603820696023e-24, 4.2036688290340520e-23, -2.1096739969909208e-22, 4.9565189100982148e-23]],
        [[3.6284380502279410e-3, 3.3582731044521280e-2, 9.8862285970420531e-2, 2.1261839871918550e-1, 4.0271119046182925e-1, 7.3063851071221350e-1, 1.3504902070673178e+0, 2.7414882692843027e+0, 7.0805085180572089e+0, 38.130782359209954e+0], [-1.7392232368211808e-4, -1.6299707326483139e-3, -4.9215853640641687e-3, -1.1004307707327583e-2, -2.1983942111227793e-2, -4.2712648688942529e-2, -8.5813351999928040e-2, -1.9150174535229206e-1, -5.4368306626706181e-1, -3.1418182300347843e+0], [3.1201159292305180e-6, 2.9278441634617018e-5, 8.8558275253442926e-5, 1.9807180957403881e-4, 3.9380800755973235e-4, 7.5246429077035333e-4, 1.4514086552330307e-3, 2.9769049244757800e-3, 7.2907152874317443e-3, 3.5181371103391407e-2], [-4.9678177147953245e-8, -4.5793440030325095e-7, -1.3318308163318552e-6, -2.7794750850939667e-6, -4.9158421317510843e-6, -7.6736689888251369e-6, -1.0164432153922768e-5, -9.0963347878191252e-6, 2.3491468917599429e-6, 2.4202513033261710e-5], [7.3828089212131739e-10, 6.5004181071688381e-9, 1.7000733326924161e-8, 2.8759588729412973e-8, 3.2054381788296639e-8, 3.8186673084283033e-9, -9.5750638732758702e-8, -2.7157066425184600e-7, -2.7142540259655074e-7, 3.3344251383638586e-7], [-1.0507247592427968e-11, -8.4956278157534276e-11, -1.7695470653829321e-10, -1.4858265005727736e-10, 2.3615750267945564e-10, 1.1524043165097165e-9, 1.8233460514686756e-9, -1.2580891700742194e-9, -8.5670788376899236e-9, 2.1849711454281027e-9], [1.4412149067223090e-13, 1.0099740831432068e-12, 1.2251868865227952e-12, -1.8412344535482832e-12, -9.2222539994853420e-12, -1.1007200360758039e-11, 2.3829072561752416e-11, 7.2127521778158353e-11, -1.1989852059723650e-10, -6.9480698280008738e-11], [-1.9380673500881620e-15, -1.0808773563434214e-14, 1.5073952789461585e-15, 6.0364404442226068e-14, 8.6167754911098300e-14, -1.9860023558156747e-13, -6.1424488516361211e-13, 1.1979740986772654e-12, 5.2690100590535093e-13, -3.8446444823575666e-12], [2.5035239900832372e-17, 9.2714658085454814e-17, -2.5076722935215010e-16, -8.1776016879779216e-16, 8.3140112227499515e-16, 5.1703413033090827e-15, -7.3534638825256684e-15, -1.7703143386738722e-14, 6.7124061420768783e-14, -1.2103901011110003e-13], [-3.2848879858003565e-19, -5.7582562252023633e-19, 4.8958729634015562e-18, 2.3584300629511181e-18, -3.7682741497999734e-17, 4.4314838688353575e-18, 2.4167868840468780e-16, -7.1706229222223324e-16, 1.4438988186448513e-15, -2.9538798882645982e-15], [3.9758015217169955e-21, -3.5871076296879120e-21, -6.8055334606315292e-20, 1.2653282253213154e-19, 3.7536187060200970e-19, -1.8161597215936871e-18, 2.2905729000021849e-18, 7.4829291346510544e-19, 3.1233719410030856e-18, -5.5082791842711167e-17], [-4.6423648847164681e-23, 1.8642696434447464e-22, 5.9146275829983387e-22, -3.1353165944476904e-21, 4.6587933043286178e-21, 1.9530494560206548e-20, -1.0373220829983512e-19, 3.6000939141351578e-19, -6.5855716511021990e-19, -4.9635530821404346e-19], [8.5134724664665740e-25, -7.7194922061407248e-25, 9.8710529073265759e-24, 5.6250954088963941e-23, -1.4870804144774629e-22, 5.1692070976184092e-22, -5.3320870763917154e-22, 3.8042085055301036e-21, -1.7765279728343586e-20, 1.7024791424027262e-20], [1.3761379147040623e-27, 1.2852137363342791e-25, 8.1048358263311974e-26, 5.9111556438745033e-25, 3.1621626872970597e-24, -9.4778779831939368e-24, 5.4022545770182287e-23, -1.3098996654471662e-22, -7.2871102751993187e-23, 1.0879272882856704e-21]],
        [[3.3037984980931038e-3, 3.0540783651017096e-2, 8.9680065251019376e-2, 1.9209410247765220e-1, 3.6171331274287463e-1, 6.5094315248370685e-1, 1.1900720752718202e+0, 2.3819013710828718e+0, 6.0514960647110983e+0, 32.129582270387048e+0], [-1.5115997180893901e-4, -1.4160770013452751e-3, -4.2726814214260951e-3, -9.5455642298473246e-3, -1.9060434612938547e-2, -3.7058581423194648e-2, -7.4713076911953844e-2, -1.6819824757252774e-1, -4.8533240559889933e-1, -2.8591123302457782e+0], [2.5884799775986505e-6, 2.4355196769241712e-5, 7.4096765078525971e-5, 1.6737463207410861e-4, 3.3801437052492872e-4, 6.6145658602626435e-4, 1.3215305749731475e-3, 2.8411801897990644e-3, 7.2867130411059511e-3, 3.5504838314253419e-2], [-3.9375859630491850e-8, -3.6630082864200434e-7, -1.0865342436516810e-6, -2.3449730894341452e-6, -4.3763532076354509e-6, -7.4440959791980886e-6, -1.1379852503801638e-5, -1.3538749437620552e-5, -3.5107463227702613e-6, 2.9750697052076073e-5], [5.5875476880923275e-10, 5.0208210725753664e-9, 1.3755043697841004e-8, 2.5468104917654820e-8, 3.4770240932903336e-8, 2.3870178294384597e-8, -5.5059572795813598e-8, -2.7713353850010715e-7, -4.6889157664274995e-7, 3.4901035862661387e-7], [-7.6189099049491641e-12, -6.4033136913305964e-11, -1.4780501151725487e-10, -1.7533922641068219e-10, 4.5640211218896351e-11, 8.3989256882196955e-10, 2.1707153796706229e-9, 7.8864019887832714e-10, -1.0977673636400963e-8, -1.3261523433520056e-9], [9.9492912066372379e-14, 7.4564466996781425e-13, 1.1781404707553885e-12, -4.9897108240459626e-13, -6.6185565413541697e-12, -1.4316095810690017e-11, 4.7177400238144288e-12, 9.4090513855701321e-11, -6.7489545976486014e-11, -2.5050767152963224e-10], [-1.2987133266709752e-15, -8.1849156742841380e-15, -4.1623943975208316e-15, 3.6313112718372617e-14, 9.4265359163591803e-14, -4.2570921624280100e-14, -7.0163535208699593e-13, 2.5724579175507250e-13, 3.4590388888935400e-12, -9.8625733214480608e-12], [1.5692848528045865e-17, 7.1452402298218478e-17, -1.1581257336419404e-16, -6.6705733157610389e-16, -2.2013858993072486e-16, 4.2830299597531855e-15, 1.9007677412624360e-15, -3.8887715809047041e-14, 1.1211640299044127e-13, -2.6819983221018469e-13], [-1.9780474249254160e-19, -5.4293745255487367e-19, 2.8561322944945810e-18, 5.5480320388901700e-18, -2.0057574779484854e-17, -4.5458811567195334e-17, 2.4433569205748378e-16, -3.4671726830411590e-16, 7.4651956652347444e-16, -5.0826675211198576e-15], [2.8807107958490308e-21, 6.0547185363252694e-21, -2.9324540532715847e-20, 5.6591302829884040e-20, 4.8356486760800469e-19, -5.8157603213725462e-19, -1.8782754834836368e-18, 1.7510934170808855e-17, -4.3187637273983764e-17, -3.0473082526584897e-17], [-2.3280988125683185e-24, 2.9556542307227953e-22, 1.2196409557121423e-21, 7.5017537378669704e-23, 1.5306394231022606e-21, 3.2871657834634520e-20, -6.6739201471872124e-20, 3.2120071333928944e-19, -1.3401764037525039e-18, 2.4416621241507925e-18], [9.5040874536007471e-25, 4.4739227622965818e-24, 1.5315132292259223e-23, 6.9722291873600238e-23, 5.1246009171626976e-24, 4.8940468062032283e-23, 1.7860037166557984e-21, -6.1224744103347787e-21, -3.9797367428760338e-21, 1.1999774318348007e-19], [-3.3335861978703239e-27, 2.4672258716871697e-26, -4.9297523862675228e-26, -3.5626017807282190e-25, 1.6011414003018100e-24, -8.6826987528997648e-24, 2.1334204051620753e-23, -2.0810221722289527e-22, 6.8201274466891885e-22, 2.6771544736519401e-21]],
        [[3.0207902541805721e-3, 2.7890455381154080e-2, 8.1688687246086021e-2, 1.7425757456743351e-1, 3.2613694602702072e-1, 5.8184011433961296e-1, 1.0507773407277636e+0, 2.0676679287139525e+0, 5.1388902802407160e+0, 26.696590856582916e+0], [-1.3220098729714344e-4, -1.2375435856118152e-3, -3.7285344783047864e-3, -8.3124677511603096e-3, -1.6556909424871254e-2, -3.2116598253746551e-2, -6.4698734296432370e-2, -1.4619204895288342e-1, -4.2735181964239323e-1, -2.5735553421466690e+0], [2.1649704048068046e-6, 2.0402271203835673e-5, 6.2286139634736027e-5, 1.4156290712211258e-4, 2.8884064252246186e-4, 5.7491234830764736e-4, 1.1811214876607890e-3, 2.6530287014007201e-3, 7.1921481033742018e-3, 3.5893114932113676e-2], [-3.1536489397485069e-8, -2.9531415416241736e-7, -8.8861205211042609e-7, -1.9658835155876784e-6, -3.8204816389279607e-6, -6.9466055296434889e-6, -1.1913797123114438e-5, -1.7724186076006381e-5, -1.2817043375469243e-5, 3.4682484253625110e-5], [4.2757765534947115e-10, 3.9018166452632326e-9, 1.1070475273431831e-8, 2.1912303029778821e-8, 3.4301937322771300e-8, 3.7208880971986277e-8, -1.2036566753008870e-8, -2.3895178157296368e-7, -6.9464939893166488e-7, 2.3425995317591171e-7], [-5.6164779278428397e-12, -4.8645115698350890e-11, -1.2125724971754935e-10, -1.7732405816704202e-10, -8.2858294329806885e-11, 4.9588703967480729e-10, 2.0625610294238867e-9, 2.9864965466182524e-9, -1.1019692732054304e-8, -1.1792086087739539e-8], [6.9249916887561992e-14, 5.4603787553266643e-13, 1.0242188077819355e-12, 2.5240054056802755e-13, -4.1588740140827039e-12, -1.3851022417037669e-11, -1.2883010030940824e-11, 8.3087431522358062e-11, 8.0595984166053430e-11, -6.7419665033758343e-10], [-8.8769605609752041e-16, -6.1353996167935216e-15, -6.3331531725325630e-15, 1.8659873113330949e-14, 7.9542318585448904e-14, 6.6613522327820710e-14, -5.1872864242334959e-13, -1.0306681885567571e-12, 7.0307242131953005e-12, -2.1276504041527090e-11], [1.0731521145986775e-17, 5.9929635802945855e-17, -1.9490563561303628e-17, -4.1786407075752306e-16, -5.7638891160429512e-16, 2.5701281237441868e-15, 8.8784278550221849e-15, -3.6399311460689563e-14, 9.4287239807927016e-14, -4.2828597233557355e-13], [-7.3060675995007766e-20, 1.3947975838302383e-20, 2.9269928291937203e-18, 8.7044375948054433e-18, 7.6820935899717661e-19, -4.0829291408596894e-17, 1.3687849418879057e-16, 5.1603069566817977e-16, -2.0612900297795703e-15, -1.9921872412590002e-15], [3.5613804428554477e-21, 2.2561986211196506e-20, 3.4922889357593262e-20, 1.1531174459133605e-19, 5.5637517164961158e-19, 7.4140139385495981e-19, -2.8797941691376860e-18, 2.1981427804706523e-17, -9.0451241212986626e-17, 2.4777999625363569e-16], [2.3908996210678789e-23, 3.8258707986353165e-22, 1.4469626229575883e-21, 1.8809263399771673e-21, 1.0349108455715096e-21, 2.2797328734812805e-20, 1.4692704387665413e-20, -1.7044228589257959e-19, -3.9879125314847221e-19, 1.0903498000227745e-17], [-2.5507403042261152e-25, -4.8485107148220260e-24, -1.7361501997955133e-23, -2.1275417010019533e-23, -9.0880145844470004e-23, -5.1779472977950235e-22, 9.8377220374991566e-22, -1.2512096620315972e-20, 4.6098846003144063e-20, 1.9843599011036384e-19], [-4.8502416341246020e-26, -4.3004865646878584e-25, -1.3542947929293508e-24, -3.3939938062899008e-24, -5.7552003221894400e-24, -1.4082330389947017e-23, -4.8737395656200179e-23, 1.4107456511333626e-24, 9.7577278408251563e-22, -1.4440604858978560e-21]],
        [[2.7725864690073255e-3, 2.5568067594514549e-2, 7.4698149462477807e-2, 1.5869447005888306e-1, 2.9519515697604719e-1, 5.2194981497552265e-1, 9.3037579322101004e-1, 1.7957920635560914e+0, 4.3410930089652034e+0, 21.837971910274499e+0], [-1.1628666398679420e-4, -1.0875087897208814e-3, -3.2700635040866188e-3, -7.2686333652843109e-3, -1.4420394842024820e-2, -2.7839975540512303e-2, -5.5821894647022098e-2, -1.2587838916191056e-1, -3.7063451125396774e-1, -2.2847066996094666e+0], [1.8241441652699168e-6, 1.7203126378065016e-5, 5.2609692314346698e-5, 1.1996034700246993e-4, 2.4621757783398260e-4, 4.9539601521857211e-4, 1.0382952935862959e-3, 2.4196892285474674e-3, 6.9649199158713201e-3, 3.6320542483352041e-2], [-2.5511355335361342e-8, -2.4001071044898243e-7, -7.2961022274489142e-7, -1.6431748809121917e-6, -3.2896095563693418e-6, -6.2891969401361364e-6, -1.1797481749829076e-5, -2.0973133837861368e-5, -2.5517545609984579e-5, 3.5434368170723942e-5], [3.3004873631159886e-10, 3.0471952108464831e-9, 8.8768719260467180e-9, 1.8462264983385702e-8, 3.1816940849029958e-8, 4.3996597014565449e-8, 2.5128731360189556e-8, -1.6220544507745210e-7, -8.7837476819546422e-7, -2.1959696241821675e-7], [-4.2153470071153338e-12, -3.7377618611995648e-11, -9.8764769158867558e-11, -1.6618309110277924e-10, -1.5785009416864001e-10, 1.9402359642903878e-10, 1.6149794443687838e-9, 4.5253483717705658e-9, -6.4756918226627168e-9, -3.6642256636792409e-8], [4.9011813347291722e-14, 4.0256682179316935e-13, 8.5652050348955683e-13, 6.4185443907285571e-13, -2.1552096602474672e-12, -1.1005856218897128e-11, -2.2837929542535556e-11, 4.1788825248823465e-11, 3.0358280309525325e-10, -1.4527942240057963e-9], [-5.5746068235564370e-16, -4.0104354295766465e-15, -4.9033311331636784e-15, 1.1306955450480580e-14, 6.5796628212973574e-14, 1.3247558242256607e-13, -1.7632231630333034e-13, -1.7534186097391088e-12, 8.1731550854297431e-12, -3.3134807893469330e-11], [1.0808197307394121e-17, 7.9408574307012054e-17, 1.2196096163957284e-16, -9.5851704510475268e-18, -1.5822884780256244e-16, 1.7889602779385364e-15, 1.1940568795423673e-14, -5.3414692502456278e-15, -4.2276390278410009e-14, -1.8531595287459053e-13], [7.5964882040943562e-20, 1.0868560983466335e-18, 5.0494310247377539e-18, 1.3935512387520273e-17, 2.1346766252142381e-17, -1.1914353433956098e-18, 3.8295326363784555e-17, 1.0798633028560867e-15, -5.2429537420505514e-15, 1.9573465180474860e-14], [3.2313661236596212e-21, 2.4246440329852693e-20, 4.9324031724987902e-20, 1.0081233703998130e-19, 3.7282313272852670e-19, 9.2303328940790790e-19, -2.2188024733015355e-18, 2.6421077145681889e-18, -4.7290464418890063e-17, 8.5024878006224897e-16], [-6.7655948857777018e-23, -5.6698917859702427e-22, -1.5849505578573999e-21, -4.4045231008971927e-21, -1.2752819785517963e-20, -2.0666815714833023e-20, -8.3522376757056847e-21, -6.4986641142934244e-19, 2.4497773157211596e-18, 1.2949086404087380e-17], [-3.7942513296490917e-24, -3.6932096590563122e-23, -1.1474304071041633e-22, -2.5021862644398445e-22, -5.0262226686990966e-22, -1.2651572613348975e-21, -1.8959481211002264e-21, -5.2643633703831575e-21, 5.5463921611859937e-20, -2.5285073314095993e-19], [-7.3118925659256668e-26, -6.6336024903529770e-25, -1.9530636886040290e-24, -4.3540958473036510e-24, -7.6633218725093303e-24, -1.0281741783193687e-23, -4.2726492157081760e-23, 2.5090689496201530e-22, -9.6394077746885263e-22, -1.7248518132277106e-20]],
        [[2.5536962556747365e-3, 2.3522104274262555e-2, 6.8552784654283864e-2, 1.4505782745987310e-1, 2.6820504382898008e-1, 4.7000262966452959e-1, 8.2659637985006471e-1, 1.5625693834789570e+0, 3.6544003865418931e+0, 17.560381764039370e+0], [-1.0283429792078406e-4, -9.6062902592867473e-4, -2.8819358048539177e-3, -6.3830478549079495e-3, -1.2600156359256274e-2, -2.4166513384638707e-2, -4.8072720262985977e-2, -1.0756455576987198e-1, -3.1638581605426368e-1, -1.9925708232326836e+0], [1.5471047541427805e-6, 1.4592469040845388e-5, 4.4644878986119072e-5, 1.0190796215389529e-4, 2.0968511290973845e-4, 4.2423462124316755e-4, 9.0010459612167136e-4, 2.1555576961722562e-3, 6.5715947015690493e-3, 3.6693485370096084e-2], [-2.0845684019678509e-8, -1.9674355734420524e-7, -6.0230223274473229e-7, -1.3734178319961744e-6, -2.8079789887582932e-6, -5.5671801901955421e-6, -1.1167697837981475e-5, -2.2806456804458110e-5, -4.0139037822114542e-5, 2.3846935606541702e-5], [2.5645560834084428e-10, 2.3888192333461860e-9, 7.0990456327621644e-9, 1.5320138932345435e-8, 2.8292234049058561e-8, 4.5570108167674753e-8, 5.1773485177738599e-8, -6.5595272722869717e-8, -9.1805071727776167e-7, -1.3760362456298019e-6], [-3.1840798125184703e-12, -2.8735385517302374e-11, -7.9238569006626847e-11, -1.4653644569547118e-10, -1.8726237287921924e-10, -1.8985743610872645e-11, 1.0514123161286882e-9, 4.9550286120555209e-9, 3.2220958033713663e-9, -8.2405403237854366e-8], [3.8782319074197082e-14, 3.3261075318634073e-13, 8.0258484398474855e-13, 1.0317644040758707e-12, -2.5639533204040402e-13, -6.4665182791512766e-12, -2.2353545470535069e-11, -4.0474040995033909e-12, 4.8392268521584754e-10, -2.3060847564400374e-9], [-1.5241912577736962e-16, -7.4060383582564256e-16, 2.0424134081730373e-15, 1.9186781965624584e-14, 7.4337778356079276e-14, 1.9326367760295093e-13, 2.0814797529297335e-13, -1.3403073856834449e-12, 3.6828385761014043e-12, -2.0473537854810475e-11], [1.4577958491687146e-17, 1.2445575738019468e-16, 3.0545177563491746e-16, 4.8094188318549589e-16, 6.7075273054402998e-16, 2.0207154061953148e-15, 1.1349669579789231e-14, 2.8233298360816543e-14, -2.3386121290056956e-13, 1.2094205291263515e-12], [8.0885213283572417e-20, 9.3560060843830525e-19, 3.7180849833246036e-18, 9.9362247058034344e-18, 1.6922859581397490e-17, -1.2390777340511925e-18, -8.9419297481525408e-17, 5.8935554159133329e-16, -4.4666342080144417e-15, 5.7694413868807665e-14], [-4.7766754869514411e-21, -4.8845422475975215e-20, -1.6761919357338355e-19, -4.1253303791291823e-19, -8.0630441848586932e-19, -1.3827321002155978e-18, -4.9806213210488905e-18, -2.6509112807222261e-17, 9.0331889260835444e-17, 7.7785940404614955e-16], [-3.0842710283345427e-22, -2.8570649528388001e-21, -8.5342206213002767e-21, -1.9386143467746958e-20, -4.1142640571719309e-20, -8.1851640367648100e-20, -1.1568510825743092e-19, -5.5923289320468300e-19, 2.9684859354175725e-18, -2.5262255652369923e-17], [-5.1360145001052310e-24, -4.8065135619300197e-23, -1.4229359705411738e-22, -2.9704255646800952e-22, -5.1981052453249766e-22, -9.4456013042563771e-22, -1.6522208678637927e-21, 9.1047912045721356e-21, -4.6444498820303594e-20, -1.3448305151587952e-18], [5.5895480757383671e-26, 5.5597931228185480e-25, 1.8447058391836821e-24, 4.6116854723930513e-24, 1.0957499868823051e-23, 2.8987983637231700e-23, 6.2877108013781802e-23, 2.6206448229969951e-22, -2.3085321104267189e-21, -1.6507387397670677e-20]],
        [[2.3596586157826391e-3, 2.1710541353515712e-2, 6.3124472602957013e-2, 1.3305760634682858e-1, 2.4458075417309847e-1, 4.2486062882603932e-1, 7.3723828599822691e-1, 1.3638104033868624e+0, 3.0725058396226611e+0, 13.869334762517010e+0], [-9.1392811320352265e-5, -8.5272406671653661e-4, -2.5518698019325060e-3, -5.6297540858875745e-3, -1.1050046063726906e-2, -2.1027539986100559e-2, -4.1392429177575676e-2, -9.1425203947026169e-2, -2.6598033813830980e-1, -1.6983979203523057e+0], [1.3196369647950465e-6, 1.2443313321966298e-5, 3.8049956443737698e-5, 8.6805906345471015e-5, 1.7858279197997553e-4, 3.6176867634755004e-4, 7.7166906489533135e-4, 1.8788062355108413e-3, 6.0060196503098335e-3, 3.6783134318280110e-2], [-1.7201761733053381e-8, -1.6268512733395171e-7, -5.0030881528975450e-7, -1.1501793124663608e-6, -2.3848439463186531e-6, -4.8475629209652842e-6, -1.0197578860378600e-5, -2.3079206495355441e-5, -5.3663046257861641e-5, -1.4451759266899751e-5], [2.0201280524000550e-10, 1.8946456562125864e-9, 5.7175271645157369e-9, 1.2690380139837562e-8, 2.4667861327196420e-8, 4.4112354939294291e-8, 6.8102587855137022e-8, 3.0074922431622550e-8, -7.3400711600059175e-7, -3.5927491829973072e-6], [-2.2511586032451436e-12, -2.0540642095217287e-11, -5.8128457096101586e-11, -1.1341681281966315e-10, -1.6576668492241756e-10, -1.0254669025706371e-10, 6.2129261077182359e-10, 4.5209049748594533e-9, 1.5109759041409021e-8, -1.3819949857165862e-7], [4.1048267202049603e-14, 3.6841029442876294e-13, 1.0027593931187654e-12, 1.8048523700832728e-12, 2.1506026246026169e-12, -2.7617520611002144e-13, -1.2260718571712188e-11, -2.7429698134922485e-11, 4.6429096471034644e-10, -2.0009938769963504e-9], [2.9363725727866149e-16, 3.1243946824202958e-15, 1.1832435000971371e-14, 3.5250442490129000e-14, 9.5466075323893324e-14, 2.3898635604769642e-13, 4.7065774875854482e-13, -3.4055682592574051e-13, -5.4750804495038285e-12, 5.4080107997137388e-11], [1.0260958858131302e-17, 8.7858916422150279e-17, 2.1417536660111618e-16, 3.0824995948559576e-16, 2.1932722689272192e-16, 4.5554960155773110e-17, 3.2227358639599779e-15, 2.5944017152199943e-14, -3.0675506821060468e-13, 3.3941104467440496e-12], [-4.3303066723475360e-19, -4.0077590376951696e-18, -1.1861787408577449e-17, -2.6289775998344530e-17, -5.5520804708842331e-17, -1.3410693319689127e-16, -3.9699360347480525e-16, -7.8872569826629596e-16, 7.6272233125068356e-16, 4.6374745804524057e-14], [-2.1380207178461997e-20, -2.0235153060117354e-19, -6.2113198323983595e-19, -1.4090634198641478e-18, -2.7972276194221176e-18, -5.1431664037834183e-18, -1.0024048565912577e-17, -3.7009547134153002e-17, 1.4125726573221884e-16, -1.8150625759876904e-15], [-3.5609155361154283e-22, -3.2645566992096048e-21, -9.4392518579443394e-21, -1.9846573540880947e-20, -3.6752933611571708e-20, -6.2467781878900465e-20, -5.8171179126743305e-20, 1.7995801852390759e-19, -9.5697862818205645e-19, -8.6735951394158402e-17], [6.4712024497648946e-24, 6.2016261480199497e-23, 1.9686482302497094e-22, 4.8022300779238977e-22, 1.0909655228405623e-21, 2.4429038188663121e-21, 5.3578647820103746e-21, 2.1686086564654576e-20, -8.0069932485010325e-20, -5.3906488840140141e-19], [4.4239075863121836e-25, 4.1550704599135525e-24, 1.2581428953225962e-23, 2.8153449150625787e-23, 5.6122517503791022e-23, 1.0942315851580474e-22, 2.1571169933862327e-22, 2.7125368677712517e-22, 1.8669388377677760e-21, 6.0406676141505277e-20]],
        [[2.1868131813349136e-3, 2.0098802947231755e-2, 5.8307166148062092e-2, 1.2245117218625080e-1, 2.2382328464141886e-1, 3.8552386297195903e-1, 6.6025291865097660e-1, 1.1951235869120388e+0, 2.5864306081826757e+0, 10.765417989298755e+0], [-8.1609510925814366e-5, -7.6049904009867075e-4, -2.2700090732634137e-3, -4.9872190654445934e-3, -9.7293758612311445e-3, -1.8354222181651903e-2, -3.5689173623274701e-2, -7.7487746906683539e-2, -2.2068109436949715e-1, -1.4060272713683073e+0], [1.1313053923921169e-6, 1.0661067229025787e-5, 3.2561330794332377e-5, 7.4155732239638966e-5, 1.5223490723733319e-4, 3.0776992941935233e-4, 6.5620655379475458e-4, 1.6076051632677064e-3, 5.3033429987567495e-3, 3.6167114086121191e-2], [-1.4272999754846350e-8, -1.3514373392838089e-7, -4.1670162366905860e-7, -9.6258603819978215e-7, -2.0129850430783046e-6, -4.1563265231352267e-6, -9.0200248550456740e-6, -2.1912416365562273e-5, -6.2455557476693486e-5, -9.5907950900175205e-5], [1.6761432567506591e-10, 1.5801920010759014e-9, 4.8241083887325660e-9, 1.0935684654782645e-8, 2.2078455112021725e-8, 4.2513629566135899e-8, 7.8647345557922447e-8, 1.1347612728524071e-7, -3.3829204278024486e-7, -6.6467722556782954e-6], [-1.1511415096807582e-12, -1.0525927179281321e-11, -2.9893535451513480e-11, -5.8436248266480339e-11, -8.3955721874413059e-11, -3.4672756691533741e-11, 4.8084331999962776e-10, 3.8062826353956754e-9, 2.3365239576187100e-8, -1.5492300676253639e-7], [5.0212943874683991e-14, 4.6121521573792423e-13, 1.3282247868334518e-12, 2.7032895337364343e-12, 4.4557847829793233e-12, 5.4100284237689469e-12, -3.3767814884928427e-13, -3.1458256716878285e-11, 1.8474044131886560e-10, 1.1417986241890697e-9], [1.8632298122857736e-16, 1.8741366865548230e-15, 6.5253834067325469e-15, 1.8042385565319280e-14, 4.7164791797890025e-14, 1.2113280285702719e-13, 2.6909586502538524e-13, -2.1421560712081920e-13, -1.3891068843286100e-11, 1.6803548086080370e-10], [-2.2930943902664414e-17, -2.2187142775362139e-16, -7.1409393947882410e-16, -1.7552989929991998e-15, -3.9519051725654644e-15, -8.6595948667293352e-15, -1.7877896206149445e-14, -2.3973229447255492e-14, -1.9422400618427020e-13, 2.8716890504397359e-12], [-1.4071459521032802e-18, -1.3133561995337477e-17, -3.9326774449354501e-17, -8.6884119072977480e-17, -1.7164272532899237e-16, -3.3607739743734126e-16, -7.2683935574904374e-16, -1.7451236212918423e-15, 4.9849217683651635e-15, -9.5595795424482019e-14], [-1.9539929519972718e-20, -1.8059205520658059e-19, -5.2808634260996864e-19, -1.1095373289645762e-18, -1.9553495887731347e-18, -2.8314635317348304e-18, -2.1783969347308185e-18, -1.3239050904365831e-19, 7.2277468952545880e-17, -4.6979908416526075e-15], [7.3045682000249324e-22, 6.9672694272261333e-21, 2.1786039098143391e-20, 5.1295136309310039e-20, 1.0959407590781514e-19, 2.3175215883594326e-19, 5.3427180148112965e-19, 1.6503745265989756e-18, -5.2704067497170376e-19, -5.0240595957535858e-18], [4.2312632620326035e-23, 3.9648591831912987e-22, 1.1968122047801281e-21, 2.6749415527012274e-21, 5.3394017192648399e-21, 1.0315326910554079e-20, 1.9947061318466107e-20, 4.0212141415866581e-20, 1.1701962502342621e-19, 4.1995508297059563e-18], [7.9043624724236140e-25, 7.3320903633277193e-24, 2.1646654149068834e-23, 4.6538160766026579e-23, 8.7148902562714995e-23, 1.5249834409715644e-22, 2.5720669217178897e-22, 2.6589910585943094e-22, 3.6613149831383981e-21, 8.3297224139896939e-20]],
        [[2.0321335255559650e-3, 1.8658253261070436e-2, 5.4012707389128240e-2, 1.1303545733229063e-1, 2.0551009804495881e-1, 3.5112779621182524e-1, 5.9379704750621401e-1, 1.0522016846339241e+0, 2.1850808717951152e+0, 8.2376357252663559e+0], [-7.3199904461411511e-5, -6.8127967181626008e-4, -2.0282420743365968e-3, -4.4372684977008166e-3, -8.6022034876357781e-3, -1.6080006651234425e-2, -3.0850355355866039e-2, -6.5642336000103930e-2, -1.8130785216280491e-1, -1.1233191508660572e+0], [9.7557258904182011e-7, 9.1860430239568252e-6, 2.8009925798806261e-5, 6.3627486041137747e-5, 1.3016247112767918e-4, 2.6197676379225239e-4, 5.5583586419144040e-4, 1.3579182525857661e-3, 4.5372149607699696e-3, 3.4285409105113261e-2], [-1.1710228742173872e-8, -1.1094589937137757e-7, -3.4256886485234797e-7, -7.9342107375108403e-7, -1.6672363880279564e-6, -3.4741573702137462e-6, -7.6840783269398342e-6, -1.9533125289696695e-5, -6.4031444361828031e-5, -2.2382162681322076e-4], [1.5642552129005535e-10, 1.4785016339708698e-9, 4.5405936220433584e-9, 1.0410972125403167e-8, 2.1476667963175596e-8, 4.3183289780682430e-8, 8.8359217900863241e-8, 1.8088466219785698e-7, 1.3899462423450541e-7, -9.0544709966979577e-6], [-1.6253829692741541e-14, -9.4337325250498287e-14, 2.0741465125604071e-13, 3.1167287859037104e-12, 1.8615779383796683e-11, 9.3262343517718430e-11, 4.7519913764560460e-10, 2.8386866047100172e-9, 2.2616042688585078e-8, -6.5090706614969391e-8], [3.7027336762001307e-14, 3.3859233274101960e-13, 9.6552961591431502e-13, 1.9287194035767089e-12, 3.0484158511489061e-12, 3.1095690860042392e-12, -4.5112758227968888e-12, -5.6657076271271809e-11, -2.5996504165559217e-10, 6.3742865015008025e-9], [-1.4053956712858812e-15, -1.3205779513656552e-14, -4.0038929349177738e-14, -8.9791065169847136e-14, -1.7882434127493356e-13, -3.4195704945884577e-13, -6.7449913852771810e-13, -1.8115068778063943e-12, -1.6607050902246513e-11, 1.7215020263567103e-10], [-7.3658307717129713e-17, -6.9236577225686002e-16, -2.1034542152141382e-15, -4.7487747792136948e-15, -9.6096160548731021e-15, -1.8885488166112167e-14, -3.7210781408280544e-14, -6.4291920683761873e-14, 4.9264203788525005e-14, -3.3938618909076540e-12], [-8.4942594953212726e-19, -7.7182652268689872e-18, -2.1755787364373717e-17, -4.2945206556798683e-17, -6.8622245671229540e-17, -8.5564699798090075e-17, -4.5719040391430865e-17, 2.4382394542515664e-16, 9.3244895503341042e-15, -2.2021443983166383e-13], [6.5090205075353178e-20, 6.1583127156400807e-19, 1.8963902489372653e-18, 4.3761084235008903e-18, 9.1644410926035518e-18, 1.9111054604479913e-17, 4.2840153466137201e-17, 1.0958544862852606e-16, 1.8450992505745960e-16, 1.3568442712267670e-16], [3.0230740901587178e-21, 2.8300843690644433e-20, 8.5226034267513957e-20, 1.8953304673500511e-19, 3.7458951496634276e-19, 7.1197076118930466e-19, 1.3671649413570731e-18, 2.8508177987437680e-18, 4.1538960531782982e-18, 2.1306183216258252e-16], [2.4914963718210084e-23, 2.2613278496272992e-22, 6.3577723154429807e-22, 1.2480550873297308e-21, 1.9600125206727956e-21, 2.2087923937480678e-21, -9.6530727343253501e-22, -2.6862926616381476e-20, -8.5902789910131073e-20, 2.6020112302440224e-18], [-2.5339941162099879e-24, -2.3939266582070856e-23, -7.3495602557719544e-23, -1.6877085852254903e-22, -3.5067862378524197e-22, -7.2088589438584919e-22, -1.5692927013949933e-21, -3.9609519912181254e-21, -1.4669914145626480e-20, -1.6835451690947420e-19]],
        [[1.8931234712303793e-3, 1.7365251409664118e-2, 5.0168160692087683e-2, 1.0464179920085442e-1, 1.8928778762683775e-1, 3.2093996748706984e-1, 5.3626842069472282e-1, 9.3107531029037362e-1, 1.8563771915906141e+0, 6.2550100515470167e+0], [-6.5914664457106444e-5, -6.1271266525308225e-4, -1.8193648973614015e-3, -3.9634854758859469e-3, -7.6350462884203780e-3, -1.4139059224234037e-2, -2.6747827773605117e-2, -5.5663645775059009e-2, -1.4801441771866202e-1, -8.6228014191741147e-1], [8.5016394154702288e-7, 7.9975415072063862e-6, 2.4337833675908212e-5, 5.5113001159082609e-5, 1.1223639918638555e-4, 2.2449535371051860e-4, 4.7238084567179054e-4, 1.1424636079095762e-3, 3.7955951176550880e-3, 3.0718035053696764e-2], [-9.1800425367413200e-9, -8.7035341513515306e-8, -2.6914782589039220e-7, -6.2499878117603605e-7, -1.3189817600859501e-6, -2.7687048996246664e-6, -6.2089053005435230e-6, -1.6279646546976096e-5, -5.8678329181594294e-5, -3.6946722238563146e-4], [1.6038948704497101e-10, 1.5147124032561232e-9, 4.6457727573755376e-9, 1.0643439275706038e-8, 2.1997500682313612e-8, 4.4678197885195423e-8, 9.4600719989600628e-8, 2.1891224784712066e-7, 4.9370108589207191e-7, -8.5288672707921402e-6], [1.3001388419359176e-13, 1.0647444713455794e-12, 2.3016239384843811e-12, 2.2431379165229338e-12, -2.0296381232004401e-12, -1.1415865638845114e-11, 1.8729883468639585e-11, 6.8126044948704101e-10, 1.1341805802759985e-8, 1.2664829389304590e-7], [-3.4838294244812493e-14, -3.3522973028217966e-13, -1.0693597977814816e-12, -2.6120933584479293e-12, -5.9509061067760855e-12, -1.4003441725457822e-11, -3.7344354920072341e-11, -1.2767860894180758e-10, -6.4111242796104688e-10, 8.6004468482419326e-9], [-3.4947138038049059e-15, -3.2677896090492421e-14, -9.8136988554426798e-14, -2.1708742666962397e-13, -4.2480259531670962e-13, -7.9214351770379695e-13, -1.4593781372570492e-12, -2.6969654376720056e-12, -8.0803984077616620e-12, -4.3188155783586566e-11], [-2.7105265474422953e-17, -2.4467443795666196e-16, -6.7926549922955297e-16, -1.2999731413961920e-15, -1.9255755020380457e-15, -1.7174875417049385e-15, 3.5172018599406170e-15, 4.3323701393152136e-14, 5.2717015189069840e-13, -8.8984524682245104e-12], [4.0526846617282912e-18, 3.8294347166322850e-17, 1.1759713318905379e-16, 2.7002153673924390e-16, 5.6029140251903743e-16, 1.1460139714849972e-15, 2.4565556625436487e-15, 5.8018647413787737e-15, 1.5907823469562369e-14, -2.7511563408772221e-14], [1.4879443457795787e-19, 1.3884006424612680e-18, 4.1521811295870545e-18, 9.1290553025520899e-18, 1.7731904200424381e-17, 3.2841853468765837e-17, 6.0408612853635452e-17, 1.0910385931601737e-16, -4.4595074014494288e-17, 8.5496829384687674e-15], [-1.4060255544437003e-21, -1.3708902623508354e-20, -4.4795049973936618e-20, -1.1277847850028622e-19, -2.6448239303271077e-19, -6.3259551547736776e-19, -1.6629319185242921e-18, -5.2575945382895657e-18, -2.1126842349581145e-17, 8.5014715902198918e-17], [-2.3665537970259346e-22, -2.2268717900621305e-21, -6.7798727978038874e-21, -1.5358051414050515e-20, -3.1258652952394317e-20, -6.2312185193442521e-20, -1.2962251620494010e-19, -3.0269471245156909e-19, -8.0860233992870323e-19, -7.4397364052048314e-18], [-4.8837843524248590e-24, -4.5416022638081491e-23, -1.3481929951017957e-22, -2.9257972042730893e-22, -5.5567113655678765e-22, -9.8656155832393107e-22, -1.6430382684060320e-21, -2.0074201098352376e-21, 6.2950915832511538e-21, -1.1124883678630917e-19]],
        [[1.7677772505712048e-3, 1.6200788230074795e-2, 4.6714791722586130e-2, 9.7134007966547795e-2, 1.7486964268304088e-1, 2.9436107116102541e-1, 4.8633381719746821e-1, 8.2831106796667115e-1, 1.5885859376073542e+0, 4.7606869198196587e+0], [-5.9510631786647673e-5, -5.5250079163885150e-4, -1.6363278477619626e-3, -3.5497152505326684e-3, -6.7945560311428352e-3, -1.2464013719856399e-2, -2.3241428999047268e-2, -4.7245968841775534e-2, -1.2032034245930077e-1, -6.3632913182504400e-1], [7.5524881344557071e-7, 7.0969704932072539e-6, 2.1548526170981095e-5, 4.8619676767762231e-5, 9.8483153637304203e-5, 1.9547365532112367e-4, 4.0677539602926346e-4, 9.6797614083608554e-4, 3.1435141138617796e-3, 2.5583078743008791e-2], [-6.6713914609968875e-9, -6.3374141014277402e-8, -1.9676027036774889e-7, -4.5976611405085497e-7, -9.7899705269998150e-7, -2.0810339850396678e-6, -4.7534902344783433e-6, -1.2854750938449743e-5, -4.9836837380627390e-5, -4.7542837055281994e-4], [1.4689626650059845e-10, 1.3834630080193601e-9, 4.2200215884631737e-9, 9.5905161207997345e-9, 1.9622831693393920e-8, 3.9447829366404571e-8, 8.3158534558221731e-8, 1.9746654407868384e-7, 5.6021962814372774e-7, -4.1911034396305626e-6], [-1.8095006736537825e-12, -1.7255408329960085e-11, -5.3946002871637045e-11, -1.2708679611852067e-10, -2.7210170568070451e-10, -5.7505569429170306e-10, -1.2623986273590838e-9, -2.9252472133190665e-9, -4.3924333889588345e-9, 2.8787340225685481e-7], [-1.1649049828508802e-13, -1.0931236332935289e-12, -3.3095750758956592e-12, -7.4343898632727966e-12, -1.4970600227996551e-11, -2.9530603206646841e-11, -6.1390180134892425e-11, -1.5021092036944239e-10, -5.6080642308643825e-10, 3.7358071927382686e-9], [-1.2201305733894518e-15, -1.0977229844730441e-14, -3.0195696337319871e-14, -5.6439868321343252e-14, -7.7799777578814657e-14, -4.3040422682162749e-14, 2.8059542860114016e-13, 2.1797622093019051e-12, 1.5266436271029687e-11, -2.7717767211653605e-10], [1.7756571043231191e-16, 1.6743778292066575e-15, 5.1192188956566425e-15, 1.1668745783019136e-14, 2.3942646838286577e-14, 4.8186742583456242e-14, 1.0128710568834238e-13, 2.3960241193471769e-13, 7.7168189536898744e-13, -3.8532369359599517e-12], [5.1358035678793412e-18, 4.7723932171890714e-17, 1.4143931104006732e-16, 3.0607456716215105e-16, 5.7856155306714785e-16, 1.0189643039617236e-15, 1.6710488734004071e-15, 1.9260179501893920e-15, -1.0955187527052320e-14, 2.7758139435712536e-13], [-1.7218700330187211e-19, -1.6400054692864126e-18, -5.1189286264664355e-18, -1.2057373344041790e-17, -2.5947236809025018e-17, -5.5850873044429967e-17, -1.2907596758195217e-16, -3.4839887916355364e-16, -1.2532969484365989e-15, 4.1046506561321535e-15], [-1.1038137625774056e-20, -1.0343699089647173e-19, -3.1214110389406553e-19, -6.9655551012131969e-19, -1.3841476582813545e-18, -2.6535580630177094e-18, -5.1482744733783321e-18, -1.0252359505114283e-17, -1.1854496513964290e-17, -2.5853858579000478e-16], [4.3561715569298664e-23, 4.4682611725199673e-22, 1.5978364507760923e-21, 4.5073014420534118e-21, 1.1959231945063666e-20, 3.2399082010705365e-20, 9.6294228813992006e-20, 3.4736460856564648e-19, 1.7952707806984337e-18, -4.0637735529535270e-18], [1.7390181360601099e-23, 1.6396484293822185e-22, 5.0128491487933260e-22, 1.1431515892102957e-21, 2.3496814957467815e-21, 4.7495053445903517e-21, 1.0065560993014411e-20, 2.3897374617469674e-20, 6.3206776912797860e-20, 2.0296524925308300e-19]],
        [[1.6545702300970833e-3, 1.5150396673203491e-2, 4.3607785901245514e-2, 9.0407738533393192e-2, 1.6203461088110761e-1, 2.7092460076043903e-1, 4.4293892839443132e-1, 7.4110874009334466e-1, 1.3713002799836624e+0, 3.6741223595213883e+0], [-5.3752654690305583e-5, -4.9842619755183236e-4, -1.4723462432595625e-3, -3.1804734067228710e-3, -6.0488824439887832e-3, -1.0990496933383775e-2, -2.0195171959740685e-2, -4.0071029890587826e-2, -9.7422546856351637e-2, -4.5516951284617933e-1], [6.8760740930406989e-7, 6.4532963683821786e-6, 1.9543051634645690e-5, 4.3908450566238560e-5, 8.8378240345005845e-5, 1.7379096020451365e-4, 3.5664811019441149e-4, 8.3020463343359372e-4, 2.5944862273591215e-3, 1.9673827193847082e-2], [-4.7609880268241845e-9, -4.5406312781708168e-8, -1.4209979418409050e-7, -3.3603721158575853e-7, -7.2711719053204332e-7, -1.5774161554914802e-6, -3.6954383267203040e-6, -1.0323108779275116e-5, -4.2119912573805559e-5, -4.9431947498688579e-4], [8.3783040933988743e-11, 7.8684808471481509e-10, 2.3868900065001209e-9, 5.3814405010731834e-9, 1.0906175427286162e-8, 2.1734616655776039e-8, 4.5784208121070442e-8, 1.1220586722476778e-7, 3.8403055343940164e-7, 1.8037223959669120e-6], [-4.2706922087857594e-12, -4.0184005174340329e-11, -1.2230155545962602e-10, -2.7671306219655919e-10, -5.6137680131561176e-10, -1.1101569061702433e-9, -2.2636680051503808e-9, -4.9776528977488524e-9, -1.0634518487191293e-8, 2.8024369261623873e-7], [-5.7517671330889071e-14, -5.2649875379620704e-13, -1.5099812138382282e-12, -3.0845538863274686e-12, -5.2824312138960519e-12, -7.7422251325507840e-12, -8.0702264552057168e-12, 6.4355754287298927e-12, 8.7031480011930867e-11, -4.1618679045824638e-9], [5.3145278610738053e-15, 5.0192687132728525e-14, 1.5396655734412776e-13, 3.5286892807558429e-13, 7.3016854695768316e-13, 1.4889884710759613e-12, 3.1979217565003646e-12, 7.8344853004154261e-12, 2.4770567133552614e-11, -2.3292674910664009e-10], [1.5141010972550805e-16, 1.4013673769761544e-15, 4.1167493159526388e-15, 8.7685853198818869e-15, 1.6118118356312908e-14, 2.6912276227360536e-14, 3.8871676155492907e-14, 2.1000110582898235e-14, -3.7237174501338516e-13, 6.1327342724648726e-12], [-7.6011142092237502e-18, -7.2074485964829474e-17, -2.2289659606054433e-16, -5.1736259973445607e-16, -1.0897311726226699e-15, -2.2750155841657033e-15, -5.0310996488470897e-15, -1.2718810512129805e-14, -4.0955626212897884e-14, 1.9823067049425303e-13], [-3.0374087791725742e-19, -2.8286029746270533e-18, -8.4210524132700376e-18, -1.8356370089335653e-17, -3.5079183679009848e-17, -6.2815997067819882e-17, -1.0616292108443554e-16, -1.3870566358628237e-16, 4.3918819410413365e-16, -7.4253697489356698e-15], [9.8054149162097232e-21, 9.3537698163162584e-20, 2.9288252030624766e-19, 6.9323223804132375e-19, 1.5018367735008208e-18, 3.2606808796753298e-18, 7.6150294969916547e-18, 2.0777358644764684e-17, 7.2749732695644165e-17, -1.7069478474488892e-16], [5.6588319665120817e-22, 5.2958246738636994e-21, 1.5932868652032976e-20, 3.5351732833335471e-20, 6.9499919559511624e-20, 1.3041826603590735e-19, 2.4082019655362721e-19, 4.0940964712087123e-19, -1.9907867793515599e-19, 7.4875098546507904e-18], [-1.1015763619190623e-23, -1.0610644600339329e-22, -3.3882495247323686e-22, -8.2656732202407365e-22, -1.8675120168890671e-21, -4.2888884672782014e-21, -1.0798057649633668e-20, -3.2718757819693976e-20, -1.3406273907177133e-19, 1.6718227028769471e-19]],
        [[1.5523965318847167e-3, 1.4203554804087660e-2, 4.0814370575445375e-2, 8.4386040455086082e-2, 1.5061776727308863e-1, 2.5027705708718899e-1, 4.0526791563710215e-1, 6.6723284747696090e-1, 1.1956746856022957e+0, 2.9029891073889648e+0], [-4.8464234599635894e-5, -4.4882822923159894e-4, -1.3223640951818432e-3, -2.8443004564482658e-3, -5.3746527629337732e-3, -9.6716526675857505e-3, -1.7510270473489255e-2, -3.3901536679656125e-2, -7.8598365128916552e-2, -3.2063406923917164e-1], [6.3561074044050826e-7, 5.9566590672091296e-6, 1.7984306577673733e-5, 4.0206960716104684e-5, 8.0327375867624042e-5, 1.5622369303343412e-4, 3.1525431287793813e-4, 7.1403622157893782e-4, 2.1198155382105198e-3, 1.4077573257714783e-2], [-4.1221759083699004e-9, -3.9400075112385926e-8, -1.2382472105989032e-7, -2.9455624847157799e-7, -6.4185548571381163e-7, -1.4025315578744893e-6, -3.3049140216849973e-6, -9.2453206465239739e-6, -3.7366997229307835e-5, -4.2780419470429763e-4], [-1.8422371080095152e-12, -1.5346606362675922e-11, -3.2745430985024628e-11, -1.4399813408691129e-11, 1.9172768512485406e-10, 1.1957025824498022e-9, 5.7957746223649904e-9, 3.0574130032544608e-8, 2.3656143591934176e-7, 6.0158011672444291e-6], [-3.6267461442511465e-12, -3.3801843043952378e-11, -1.0084362799885362e-10, -2.2084978980916831e-10, -4.2646678669381497e-10, -7.8300756359341836e-10, -1.4204255623725498e-9, -2.5296097562399086e-9, -2.6725659727771823e-9, 1.2858229268898672e-7], [1.0793884833927673e-13, 1.0241910328696409e-12, 3.1708948386439768e-12, 7.3663494356133855e-12, 1.5505865242210205e-11, 3.2216129492039997e-11, 7.0172373079023925e-11, 1.6959779448887382e-10, 4.4764040342778605e-10, -7.3224368839600783e-9], [4.6227448879062348e-15, 4.2915669596447412e-14, 1.2693104357873732e-13, 2.7375162551891585e-13, 5.1486523540909869e-13, 9.0121214845111487e-13, 1.4798677610613006e-12, 1.9637262382125418e-12, -2.1894267376744864e-12, 1.2637887532633637e-11], [-1.8966882081734488e-16, -1.7996366644626853e-15, -5.5722974465881870e-15, -1.2953816741348615e-14, -2.7323772208765041e-14, -5.7064886270350226e-14, -1.2584496120895142e-13, -3.1421116769365242e-13, -9.4842964292618777e-13, 7.2095194759257915e-12], [-6.7703456368446761e-18, -6.2715179856331467e-17, -1.8455209872471811e-16, -3.9413881850809865e-16, -7.2721539577075694e-16, -1.2205774704789860e-15, -1.7781790274601484e-15, -1.0196307136435797e-15, 1.6638849638163136e-14, -1.2781546001688746e-13], [3.4304201824932939e-19, 3.2525339871224580e-18, 1.0056348378521024e-17, 2.3326071154318879e-17, 4.9048973615129896e-17, 1.0197353971604394e-16, 2.2311923782714838e-16, 5.4633434775565952e-16, 1.5153518790462916e-15, -5.9320034611225329e-15], [9.4062099582872142e-21, 8.6870032535324564e-20, 2.5386510483039295e-19, 5.3495403460541824e-19, 9.6127592640018585e-19, 1.5187668024688021e-18, 1.8016341530028293e-18, -1.5999655066146872e-18, -4.3042919534804936e-17, 2.1340350654455295e-16], [-6.0008905542350006e-22, -5.6894015540904206e-21, -1.7589369718945214e-20, -4.0796784992908796e-20, -8.5783768840894819e-20, -1.7831094766233911e-19, -3.8947365410150700e-19, -9.4298290118850968e-19, -2.3630942216989791e-18, 4.3692247456447272e-18], [-1.2549282588721743e-23, -1.1535868505240012e-22, -3.3345040837382587e-22, -6.8746490105979204e-22, -1.1798198824452002e-21, -1.6525580904616398e-21, -9.7888269701853304e-22, 8.5666623024981186e-21, 9.6988374585355078e-20, -2.7594347209274398e-19]],
        [[1.4355364497351306e-3, 1.3122246344068660e-2, 3.7634322698954146e-2, 7.7566143052678199e-2, 1.3778779507754532e-1, 2.2734100703152033e-1, 3.6415625715134954e-1, 5.8892505495281646e-1, 1.0196336585080955e+0, 2.2426603004426490e+0], [-6.7556379491499072e-5, -6.2463843125662568e-4, -1.8341676217559693e-3, -3.9236006502578905e-3, -7.3531629388896995e-3, -1.3070631172141504e-2, -2.3225172721924679e-2, -4.3607220628212922e-2, -9.5352807007837997e-2, -3.3030216423573265e-1], [1.4517299156295275e-6, 1.3576137810989622e-5, 4.0807168243897856e-5, 9.0573736570804762e-5, 1.7899257972178315e-4, 3.4253453992343003e-4, 6.7444801643318406e-4, 1.4675844852873475e-3, 4.0391929892979477e-3, 2.1826695998668706e-2], [-1.9487904483137647e-8, -1.8531370505136502e-7, -5.7634241370868867e-7, -1.3489720488975451e-6, -2.8731152723858012e-6, -6.0854542617504276e-6, -1.3736865335375216e-5, -3.6096100822635729e-5, -1.3142353025575134e-4, -1.1773149976889718e-3], [-2.6253805452129894e-10, -2.4006027331279567e-9, -6.8596206279873350e-9, -1.3860452914730706e-8, -2.2968796306191218e-8, -2.9880241681391562e-8, -9.8550263214302174e-9, 1.9038153997320565e-7, 1.9727865184612484e-6, 4.4008671616177597e-5], [5.9447049088541893e-12, 5.8442373852686313e-11, 1.9345616306961819e-10, 4.9250380000314230e-10, 1.1551152299286428e-9, 2.6968340595343969e-9, 6.6026374294858250e-9, 1.7772198586463561e-8, 5.1603414417563643e-8, -5.2141159275991568e-7], [1.8377089926370104e-12, 1.7102042942971569e-11, 5.0846933456073810e-11, 1.1063928082576581e-10, 2.1111720329001836e-10, 3.7872302344021939e-10, 6.5251914264128258e-10, 9.9476375853278594e-10, -2.4495831216208514e-10, -5.7637454955856694e-8], [-9.5674246720297470e-14, -9.0688891822137768e-13, -2.8017126571239809e-12, -6.4859321054734225e-12, -1.3579873371056882e-11, -2.7985352957201359e-11, -6.0164882353568281e-11, -1.4211291249899496e-10, -3.6038153804923863e-10, 3.8044341608526361e-9], [-3.8756274568120141e-15, -3.5528578743382440e-14, -1.0216902354653788e-13, -2.0933235871419170e-13, -3.5849121064395482e-13, -5.1616833795723605e-13, -4.5481257242091724e-13, 1.2179265876704045e-12, 1.4887810663327936e-11, -3.1330283594120440e-11], [4.9661539856905234e-16, 4.6750403082457179e-15, 1.4239806982528094e-14, 3.2237889102436786e-14, 6.5362352839389410e-14, 1.2871804992999332e-13, 2.5892341905686303e-13, 5.4740865766856694e-13, 1.0434027902740196e-12, -8.3817680735223903e-12], [-7.0182419192922884e-19, -1.0537333997958267e-17, -5.7096140809934240e-17, -2.2091212624758651e-16, -7.2681185565000022e-16, -2.2507967293101668e-15, -7.1201898027579713e-15, -2.5119578800309141e-14, -1.0841129264856183e-13, 4.3676324585701252e-13], [-1.9202962869232402e-18, -1.7971939513084261e-17, -5.4064603232842577e-17, -1.1987446738814993e-16, -2.3514346212926163e-16, -4.3878912882836101e-16, -8.0024251069089542e-16, -1.3340639531343014e-15, 8.1770431900453494e-18, 5.4093212677720795e-15], [6.3774463224739099e-20, 6.1381504319759246e-19, 1.9553258130692897e-18, 4.7414055291255338e-18, 1.0571824135896346e-17, 2.3628809940635115e-17, 5.6305827445060682e-17, 1.5164148379854745e-16, 4.5798289009522970e-16, -1.4628527251616163e-15], [5.4583382786128143e-21, 5.0587864030795353e-20, 1.4895642418102617e-19, 3.1796772590347878e-19, 5.8389276161604665e-19, 9.6150787162233025e-19, 1.2916289283647454e-18, -3.3396228017026818e-20, -1.8692928726654317e-17, 3.9663293240489554e-17]],
        [[1.3112593658871204e-3, 1.1974197474417184e-2, 3.4269606070316123e-2, 7.0390498026685242e-2, 1.2440170630573619e-1, 2.0370696492012970e-1, 3.2258607220710035e-1, 5.1213574122120844e-1, 8.5666905849037030e-1, 1.7196507360616462e+0], [-5.6929649853462413e-5, -5.2538968294588262e-4, -1.5366564006571867e-3, -3.2661656018638697e-3, -6.0624886369208243e-3, -1.0624577390505554e-2, -1.8478736782878196e-2, -3.3517752217950577e-2, -6.8746999759953135e-2, -2.0134750998390724e-1], [1.2016734073841623e-6, 1.1207431005676599e-5, 3.3497763362317502e-5, 7.3672351603159934e-5, 1.4360646654403100e-4, 2.6930949858456339e-4, 5.1432395252856295e-4, 1.0654877429685560e-3, 2.6779182608626408e-3, 1.1424761008414658e-2], [-2.1318228624301069e-8, -2.0127620692104229e-7, -6.1690829443866268e-7, -1.4113306766950694e-6, -2.9099472765301099e-6, -5.8942317367095723e-6, -1.2506302481844000e-5, -3.0026375532479486e-5, -9.4199418866259996e-5, -5.9999738368339579e-4], [6.7938737084317814e-11, 7.1343619101692710e-10, 2.6411670803515496e-9, 7.6850190241467187e-9, 2.0733270572624627e-8, 5.5878920475309006e-8, 1.6027256551788093e-7, 5.3392985051701275e-7, 2.4597544360919588e-6, 2.7031658570336672e-5], [1.7412384686491325e-11, 1.6226825847859586e-10, 4.8373913583681642e-10, 1.0564197498814289e-9, 2.0234228293236750e-9, 3.6351173749470345e-9, 6.2031020969602497e-9, 8.7708579566730296e-9, -1.1957671338767525e-8, -9.0374747227464661e-7], [-5.4078155030784425e-13, -5.1704625469073008e-12, -1.6247391248976499e-11, -3.8559816586817782e-11, -8.3361568551340631e-11, -1.7849882357717888e-10, -4.0095828120212614e-10, -9.9685720014097333e-10, -2.7821922969990098e-9, 1.1794213324737124e-8], [-3.4101037970478908e-14, -3.1292952372233498e-13, -9.0214089791678895e-13, -1.8582542008335871e-12, -3.2209079960805900e-12, -4.7950887875152355e-12, -5.0096846963420692e-12, 6.0773046676565704e-12, 1.0544740226210720e-10, 9.5976950501482336e-10], [3.7367341896951216e-15, 3.5031356926919088e-14, 1.0577680864568028e-13, 2.3607820415635967e-13, 4.6836109527659174e-13, 8.9246407899538518e-13, 1.7035416590709499e-12, 3.2712543211438803e-12, 4.5530363535063031e-12, -7.9999754553039789e-11], [-8.9978453278499768e-17, -8.6741312460390335e-16, -2.7703482323998559e-15, -6.7336595716904674e-15, -1.5018722698528904e-14, -3.3426554369989518e-14, -7.8709092846460131e-14, -2.0742388076795304e-13, -6.2356028431607703e-13, 2.5533010708727607e-12], [-7.6168049487005449e-18, -7.0131255925823009e-17, -2.0365347857567450e-16, -4.2479352779501075e-16, -7.5219009611246503e-16, -1.1668717236265765e-15, -1.3840473436489156e-15, 6.0800022785913939e-16, 2.0437029220889244e-14, 3.4245516215635692e-14], [7.0378080084878730e-19, 6.6161829497031976e-18, 2.0090897662544808e-17, 4.5234798924682978e-17, 9.0844231135083812e-17, 1.7589574069974463e-16, 3.4246453443504100e-16, 6.7175066721136918e-16, 9.4435767742922410e-16, -7.9230130060287271e-15], [-1.1959844236568076e-20, -1.1770691029347640e-19, -3.9083810088550479e-19, -1.0016015435736940e-18, -2.3777686229107344e-18, -5.6634002090248256e-18, -1.4300661163962370e-17, -4.0312534755039470e-17, -1.2666684357911786e-16, 3.6805190014733962e-16], [-1.6892159466173112e-21, -1.5605707644245665e-20, -4.5639800792416481e-20, -9.6323422822008924e-20, -1.7374965594932260e-19, -2.7808149403017512e-19, -3.5492625948145645e-19, 3.5037522840850383e-20, 4.4211045032919073e-18, -1.2682424639306140e-18]],
        [[1.2062304732463843e-3, 1.1005696598842139e-2, 3.1441725693070906e-2, 6.4396220092986773e-2, 1.1332053243024253e-1, 1.8440169537648770e-1, 2.8930285481001758e-1, 4.5258964545261872e-1, 7.3746759571695594e-1, 1.3899186514171984e+0], [-4.8299965665158788e-5, -4.4500173193806851e-4, -1.2969895478037640e-3, -2.7411984400934080e-3, -5.0453590460906786e-3, -8.7338557859348543e-3, -1.4914724291295204e-2, -2.6284129893444710e-2, -5.1212467574778757e-2, -1.3264245153698608e-1], [9.6117671141536391e-7, 8.9421991226629240e-6, 2.6589004820920001e-5, 5.7989758035973382e-5, 1.1163468758147775e-4, 2.0557031256143867e-4, 3.8209884710417041e-4, 7.5850199814936713e-4, 1.7670173043224771e-3, 6.2879851569800441e-3], [-1.8280914502257868e-8, -1.7180653501493750e-7, -5.2159479801589424e-7, -1.1753505388398340e-6, -2.3705680219986994e-6, -4.6539921547795705e-6, -9.4421709319924387e-6, -2.1188578280019318e-5, -5.9288972015159168e-5, -2.9169640546904396e-4], [2.6253170738726310e-10, 2.5073317768275539e-9, 7.8641735181512117e-9, 1.8628820960895062e-8, 4.0257456322501182e-8, 8.6571912150803765e-8, 1.9776762616088145e-7, 5.1930442091145138e-7, 1.8117464163074262e-6, 1.2824769546844337e-5], [2.6024222255961583e-12, 2.2818219555606793e-11, 5.8853977054117544e-11, 9.4466934401169469e-11, 7.4748953468869661e-11, -1.9110815256824054e-10, -1.4387222116198544e-9, -7.1441438097152208e-9, -4.1387809667637897e-8, -5.0479687661676772e-7], [-4.5526771939964681e-13, -4.2447515052987483e-12, -1.2668408454000894e-11, -2.7727271536950797e-11, -5.3335805874341392e-11, -9.6683681537565071e-11, -1.6876863794541300e-10, -2.6161074415865772e-10, 5.6291411877074946e-11, 1.5938147864230872e-8], [1.9212517066941455e-14, 1.8161291598999242e-13, 5.5784683458397077e-13, 1.2794080672458667e-12, 2.6415054097626260e-12, 5.3320772343440696e-12, 1.1109572412601122e-11, 2.4966849820896804e-11, 5.8889052857524888e-11, -2.7809574968050048e-10], [-2.3042794133975561e-17, -3.6588169379060507e-16, -2.0513463466392994e-15, -8.0107809645526258e-15, -2.6175786285414615e-14, -7.9447814098761941e-14, -2.4266331203988802e-13, -8.1012092065269986e-13, -3.2686657590116007e-12, -8.1285253199707855e-12], [-5.0804325336422071e-17, -4.7045822136983586e-16, -1.3837515165283341e-15, -2.9549643532884058e-15, -5.4634330544152071e-15, -9.2676881046645099e-15, -1.4208556538083571e-14, -1.4482522043715654e-14, 5.3381563257520177e-14, 9.9221585481655578e-13], [3.3544508207294477e-18, 3.1488807970476086e-17, 9.5336007452474612e-17, 2.1367328160782230e-16, 4.2647277549045078e-16, 8.1957343762595857e-16, 1.5845656216855682e-15, 3.1212313438234139e-15, 5.0288588319597063e-15, -4.7379752526351598e-14], [-7.7145679532451684e-20, -7.4285183106380340e-19, -2.3666497352049787e-18, -5.7280850033778774e-18, -1.2689514604672630e-17, -2.7940097415934276e-17, -6.4642567067001029e-17, -1.6518177012804775e-16, -4.6784025631518966e-16, 1.1097670568243428e-15], [-4.0923076452513363e-21, -3.7204211631639646e-20, -1.0499271834135954e-19, -2.0761707240809548e-19, -3.3163896951163849e-19, -4.0096445365786089e-19, -5.9681602055538504e-20, 2.4647052932172739e-18, 1.7644961578339636e-17, 2.0465117047331588e-17], [4.5971536067953820e-22, 4.2910980261037361e-21, 1.2835954745942523e-20, 2.8190113634169644e-20, 5.4470751602607804e-20, 9.9279190453233608e-20, 1.7440880169778683e-19, 2.7440874937278267e-19, 4.7600512789334531e-20, -3.3894883954960160e-18]],
        [[1.1166763850069388e-3, 1.0181188598186025e-2, 2.9042154269264081e-2, 5.9336635302030258e-2, 1.0404039894733770e-1, 1.6841774533427788e-1, 2.6220729938301506e-1, 4.0537597831301158e-1, 6.4723374644593104e-1, 1.1658861320449806e+0], [-4.1415678095991368e-5, -3.8102212342002892e-4, -1.1071684285192097e-3, -2.3286660134718302e-3, -4.2553442556475800e-3, -7.2900241249473484e-3, -1.2260531345542914e-2, -2.1104026670552368e-2, -3.9489814265283695e-2, -9.3498086756542890e-2], [7.6726774970595729e-7, 7.1227293316597445e-6, 2.1083500077885982e-5, 4.5649394858717356e-5, 8.6938072303389482e-5, 1.5762001917993414e-4, 2.8636054006758628e-4, 5.4879362901941262e-4, 1.2034843396439350e-3, 3.7451560454344461e-3], [-1.4090339846618828e-8, -1.3199771466785530e-7, -3.9806952403204392e-7, -8.8745683825506830e-7, -1.7619894642281635e-6, -3.3820970574292564e-6, -6.6409644791658190e-6, -1.4179075218442617e-5, -3.6471495542174732e-5, -1.4934695311282674e-4], [2.4404755050459489e-10, 2.3094312816548488e-9, 7.1100369737929943e-9, 1.6370706584385613e-8, 3.4020624739008241e-8, 6.9480364575205708e-8, 1.4832514547215664e-7, 3.5523676394809385e-7, 1.0801098588998713e-6, 5.8716143054822583e-6], [-2.9064614872250192e-12, -2.8127014511635018e-11, -9.0522974561117798e-11, -2.2257791323587701e-10, -5.0438433008618798e-10, -1.1475716010591780e-9, -2.7954255432288530e-9, -7.8809567123972920e-9, -2.9645829823541631e-8, -2.2276718479318537e-7], [-6.2532014093008863e-14, -5.6011933698343540e-13, -1.5250706907470356e-12, -2.7928416582772977e-12, -3.6731448639945839e-12, -1.4700977581273223e-12, 1.4943025850236031e-11, 1.0033802949322089e-10, 6.4076674371264097e-10, 7.8341137715731978e-9], [7.4438493037877670e-15, 6.9250770529022942e-14, 2.0571830766556588e-13, 4.4680708914791967e-13, 8.4926547190837390e-13, 1.5105285375207463e-12, 2.5487592460244574e-12, 3.6209501024872796e-12, -2.9644717251334124e-12, -2.3659003100032780e-10], [-3.6711852886346108e-16, -3.4479536668400044e-15, -1.0451370422567690e-14, -2.3476865943227608e-14, -4.7052176807701925e-14, -9.1138230209652448e-14, -1.7911358577050652e-13, -3.6760865224785973e-13, -7.0994685340052008e-13, 5.0129959243303445e-12], [9.4971633152795590e-18, 9.0566328492711940e-17, 2.8314666060734765e-16, 6.6711189461184687e-16, 1.4292256503765936e-15, 3.0295594353343428e-15, 6.7390703679529600e-15, 1.6674262698781240e-14, 4.8173291870634351e-14, 6.7162584340007095e-15], [1.4673778656396592e-19, 1.2788578639925802e-18, 3.2518536157509546e-18, 5.0579329309928503e-18, 3.4952518016276911e-18, -1.1930374468746240e-17, -7.9033852181539733e-17, -3.5920955854843787e-16, -1.7472544421441591e-15, -7.6082064556879936e-15], [-3.0593435206631535e-20, -2.8346444523590086e-19, -8.3486000193318511e-19, -1.7874047374766620e-18, -3.3212818864254980e-18, -5.6950079750582492e-18, -8.9913990961280530e-18, -1.0684606936627289e-17, 1.9442532451230703e-17, 4.6338687225181928e-16], [1.7168449543535183e-21, 1.6086602138744749e-20, 4.8516207875516805e-20, 1.0805744634758266e-19, 2.1365105212674194e-19, 4.0491137061912703e-19, 7.6655326388408717e-19, 1.4593495766416274e-18, 2.2068237126393352e-18, -1.7204799360689262e-17], [-4.7663933072271855e-23, -4.5391596114819147e-22, -1.4148733969376769e-21, -3.3158135133104430e-21, -7.0402279036344299e-21, -1.4696675101113431e-20, -3.1804602761054728e-20, -7.4398003128457965e-20, -1.8367555495728632e-19, 3.5877117055157280e-19]],
        [[1.0394915141755287e-3, 9.4715240438676430e-3, 2.6982629585101313e-2, 5.5013690074740816e-2, 9.6164284646337321e-2, 1.5498235172577820e-1, 2.3975057209289332e-1, 3.6708037241308661e-1, 5.7667700789393212e-1, 1.0041159130917199e+0], [-3.5892170012945385e-5, -3.2979301508190501e-4, -9.5581697081069922e-4, -2.0019620454078336e-3, -3.6359296010716291e-3, -6.1742112153977374e-3, -1.0252109131658232e-2, -1.7308682338753154e-2, -3.1358684164612050e-2, -6.9390541835603497e-2], [6.1957489462964173e-7, 5.7408783995318594e-6, 1.6927018523329130e-5, 3.6421355319517430e-5, 6.8727766303102472e-5, 1.2296901146350155e-4, 2.1917022422073555e-4, 4.0801986913075687e-4, 8.5250510290001834e-4, 2.3973400713898772e-3], [-1.0681097363692686e-8, -9.9803928666338272e-8, -2.9938329088747114e-7, -6.6177666080218392e-7, -1.2975465414186863e-6, -2.4462929395613983e-6, -4.6803661504436168e-6, -9.6087818172951160e-6, -2.3155664737833045e-5, -8.2765887722979378e-5], [1.8227484631001039e-10, 1.7178114822913217e-9, 5.2441211354821884e-9, 1.1914450072308826e-8, 2.4288439601510919e-8, 4.8289825748148240e-8, 9.9273002429345715e-8, 2.2500849371647959e-7, 6.2622223870609648e-7, 2.8493599779113470e-6], [-2.9207241404488124e-12, -2.7805535463837909e-11, -8.6651300178850909e-11, -2.0325267821471912e-10, -4.3328142974221642e-10, -9.1466063025874407e-10, -2.0359579671385513e-9, -5.1367004943502794e-9, -1.6649826080445573e-8, -9.7233798329151870e-8], [3.1270716268560915e-14, 3.0595634659257821e-13, 1.0054793141783081e-12, 2.5453234617664488e-12, 5.9759196106973627e-12, 1.4151947467032250e-11, 3.6005430314968832e-11, 1.0628440270916497e-10, 4.1871769817688701e-10, 3.2441671452212111e-9], [7.6881570414683318e-16, 6.8582007544319259e-15, 1.8481061173795711e-14, 3.3038634864590247e-14, 4.0350571381786339e-14, 1.8980509172961059e-15, -2.3861005303127623e-13, -1.4409903735600046e-12, -8.8704929847735489e-12, -1.0300912018126835e-10], [-8.4982304177095675e-17, -7.8811751768079186e-16, -2.3254855422475037e-15, -4.9932398217033841e-15, -9.3149057509435756e-15, -1.6042471964426154e-14, -2.5336867275416109e-14, -2.8516982990645548e-14, 8.7700096540094254e-14, 2.9582452407853372e-12], [4.5014817881675692e-18, 4.2088877445586143e-17, 1.2639843284462072e-16, 2.7972371210868440e-16, 5.4837404013564254e-16, 1.0284086002165187e-15, 1.9235255353233558e-15, 3.6143773689392805e-15, 5.2757871705113926e-15, -6.8624252862010714e-14], [-1.6394145578668258e-19, -1.5435877311398324e-18, -4.7035055946191665e-18, -1.0656231458418211e-17, -2.1636573930718233e-17, -4.2747221259582862e-17, -8.6757869942438749e-17, -1.8941843593397604e-16, -4.4441768163765042e-16, 7.9315815683246629e-16], [3.2396347151426261e-21, 3.1077287016716283e-20, 9.8289699371557544e-20, 2.3546881782902883e-19, 5.1525526839852121e-19, 1.1200412552048891e-18, 2.5659158351120093e-18, 6.5858906246025232e-18, 2.0261210276626537e-17, 3.3535108251499057e-17], [7.1990608547159844e-23, 6.3696311966318795e-22, 1.6851684440106046e-21, 2.9070870499788710e-21, 3.2526693374232747e-21, -8.5402887116366501e-22, -2.2563423428230431e-20, -1.1852051700125424e-19, -6.0437271152234024e-19, -2.9730161488800386e-18], [-1.0302989024004455e-23, -9.5289516319629277e-23, -2.7957486239598892e-22, -5.9480105283514720e-22, -1.0945729289061314e-21, -1.8488337249403731e-21, -2.8449681043200099e-21, -3.1677251921151531e-21, 6.7572815493936497e-21, 1.3504961787017021e-19]],
        [[9.7229014066368883e-4, 8.8543761864378317e-3, 2.5195960894921535e-2, 5.1278087174672006e-2, 8.9397202008433838e-2, 1.4353315117235601e-1, 2.2083906467411042e-1, 3.3540061114104495e-1, 5.2000531203085814e-1, 8.8183284790243866e-1], [-3.1402840002775554e-5, -2.8822883718727851e-4, -8.3346759938783649e-4, -1.7394025533607327e-3, -3.1423911071522347e-3, -5.2960196727002041e-3, -8.6992080089605817e-3, -1.4451521536737441e-2, -2.5501934324516737e-2, -5.3534049789523187e-2], [5.0711460771306312e-7, 4.6911685577650411e-6, 1.3785123509934525e-5, 2.9500714074962053e-5, 5.5228173082076297e-5, 9.7703714854771048e-5, 1.7133560833059401e-4, 3.1133458801637147e-4, 6.2532025362861841e-4, 1.6249420220359079e-3], [-8.1879174026964848e-9, -7.6340551647925055e-8, -2.2796295721406277e-7, -5.0026280662886307e-7, -9.7050226620917384e-7, -1.8022325883444178e-6, -3.3740960126516081e-6, -6.7063720744549190e-6, -1.5331486753625161e-5, -4.9318092911010980e-5], [1.3201478360196146e-10, 1.2405677959351605e-9, 3.7646725496671934e-9, 8.4722891077845306e-9, 1.7033587211629513e-8, 3.3207063915391164e-8, 6.6380861245482670e-8, 1.4434087376340011e-7, 3.7565078488392306e-7, 1.4961814541241227e-6], [-2.1074914808961733e-12, -1.9965321510266979e-11, -6.1598690083114030e-11, -1.4225428321948065e-10, -2.9664817758672474e-10, -6.0773498782265024e-10, -1.2986522451270213e-9, -3.0931669145043936e-9, -9.1764262323480946e-9, -4.5314531316708616e-8], [3.1746715176122594e-14, 3.0374020506487308e-13, 9.5610688741239221e-13, 2.2772042080315567e-12, 4.9565116794287569e-12, 1.0747850999773992e-11, 2.4740785481425409e-11, 6.5051528456777388e-11, 2.2160241419708486e-10, 1.3653315446080042e-9], [-3.3529042008634945e-16, -3.2968155019488650e-15, -1.0937842217644781e-14, -2.8061906934775778e-14, -6.6991942507179942e-14, -1.6178677263656830e-13, -4.2094905015953252e-13, -1.2742857128832108e-12, -5.1553304584245675e-12, -4.0583443660013469e-11], [-6.0919972309077632e-18, -5.3268889867821460e-17, -1.3627550856772346e-16, -2.1314057324257470e-16, -1.4139097806113473e-16, 5.7717583891797568e-16, 3.8741399273072906e-15, 1.8868455506479765e-14, 1.0717683603892672e-13, 1.1697142662167387e-12], [7.2294586131596077e-19, 6.6778047609287860e-18, 1.9532869449853608e-17, 4.1300531342266048e-17, 7.5024509129262140e-17, 1.2286840169990991e-16, 1.7154039180854613e-16, 8.3786827820322287e-17, -1.4972465228472783e-15, -3.1634570703164445e-14], [-3.9654652434723253e-20, -3.6943383869142484e-19, -1.1010668934938921e-18, -2.4065766143587357e-18, -4.6288879760519028e-18, -8.4292351157771037e-18, -1.5005105114849894e-17, -2.5365631000821263e-17, -1.9784935254036029e-17, 7.5152350140340583e-16], [1.6301015040627115e-21, 1.5261184130909590e-20, 4.5960644531091387e-20, 1.0221250517962743e-19, 2.0202632784518762e-19, 3.8426437454702164e-19, 7.3828917999469761e-19, 1.4776032095740591e-18, 2.8513385999121620e-18, -1.3076962692541413e-17], [-5.0096934490919923e-23, -4.7197741538091537e-22, -1.4400154895317395e-21, -3.2692340858499577e-21, -6.6587179683155588e-21, -1.3219724170037761e-20, -2.7055984942287860e-20, -6.0133132320748202e-20, -1.4971209999673176e-19, 7.6905715055770436e-21], [8.7724191466964705e-25, 8.4235873658203866e-24, 2.6689545487574824e-23, 6.4082646192956278e-23, 1.4053742422911854e-22, 3.0600387046839996e-22, 7.0152610042988612e-22, 1.8009598098947518e-21, 5.5765087928454798e-21, 1.2756530296915310e-20]],
        [[9.1325363104420106e-4, 8.3127666250651689e-3, 2.3631309964942790e-2, 4.8017773270169621e-2, 8.3520363842558163e-2, 1.3366007636716013e-1, 2.0469468233937935e-1, 3.0875833007373855e-1, 4.7348538852624695e-1, 7.8613833446291593e-1], [-2.7705986235892206e-5, -2.5405433724333418e-4, -7.3319090359010943e-4, -1.5253032643592219e-3, -2.7429287323888275e-3, -4.5927048655360343e-3, -7.4742072186485347e-3, -1.2247695745200967e-2, -2.1145395021494565e-2, -4.2553781970167893e-2], [4.2026699526213559e-7, 3.8821928312113238e-6, 1.1374067560238351e-5, 2.4225895872469205e-5, 4.5040803835214704e-5, 7.8905056027995325e-5, 1.3645616714183575e-4, 2.4291791969828149e-4, 4.7216574779123298e-4, 1.1517197192638654e-3], [-6.3748466440828796e-9, -5.9322634353161191e-8, -1.7644423592151915e-7, -3.8476590710640341e-7, -7.3959002459187150e-7, -1.3556098247548591e-6, -2.4912375204285495e-6, -4.8179146140363956e-6, -1.0543094909603021e-5, -3.1171033842913000e-5], [9.6681248749325126e-11, 9.0634347865384254e-10, 2.7367191128079771e-9, 6.1100875431218183e-9, 1.2142668233288126e-8, 2.3286695334842727e-8, 4.5476451388692087e-8, 9.5546645188252382e-8, 2.3540039365611523e-7, 8.4359003263652760e-7], [-1.4643615941028823e-12, -1.3829634045899941e-11, -4.2395725765441689e-11, -9.6917504989293879e-11, -1.9915285323627484e-10, -3.9965502636220502e-10, -8.2951746621102462e-10, -1.8936920830900774e-9, -5.2536219131881820e-9, -2.2824563796330015e-8], [2.1993394576481119e-14, 2.0930012735710703e-13, 6.5171355738289812e-13, 1.5264834975274935e-12, 3.2461158772832581e-12, 6.8233671810976064e-12, 1.5068558150790107e-11, 3.7419421074793826e-11, 1.1702471558598408e-10, 6.1697701697324621e-10], [-3.1513726737177986e-16, -3.0271381062554675e-15, -9.6056122032900695e-15, -2.3159852219886699e-14, -5.1258482466713690e-14, -1.1357539657535052e-13, -2.6860850154658213e-13, -7.3011639366577601e-13, -2.5880905132723557e-12, -1.6629324359181106e-11], [3.4555132928108850e-18, 3.3977120283777830e-17, 1.1277004042235750e-16, 2.8974237602379212e-16, 6.9401317526106264e-16, 1.6862557108063959e-15, 4.4296626479105427e-15, 1.3592842916980375e-14, 5.5919271340123274e-14, 4.4473908640171075e-13], [2.9132221195539108e-20, 2.3732319230367986e-19, 4.8679419774111424e-19, 2.2889283118373464e-19, -2.2274250584046078e-18, -1.2431051243996468e-17, -5.1049737123658369e-17, -2.1313155939532051e-16, -1.1274979282841627e-15, -1.1679078212462900e-14], [-4.7652304536503933e-21, -4.3771076228586745e-20, -1.2644107609558490e-19, -2.6125071042611363e-19, -4.5456206148025658e-19, -6.7805044369861883e-19, -6.9036038287150782e-19, 1.1134817818547944e-18, 1.8347547069391862e-17, 2.9503704999646152e-16], [2.6884148395181632e-22, 2.4961774022944033e-21, 7.3864107187680701e-21, 1.5950400791434569e-20, 3.0091759627097925e-20, 5.3063351793943590e-20, 8.8841643939253346e-20, 1.2678118667370665e-19, -7.3998526617190159e-20, -6.8924271918132442e-18], [-1.1616271052926631e-23, -1.0833981831042016e-22, -3.2369905119110632e-22, -7.1071966395545881e-22, -1.3781421284718441e-21, -2.5479758243240729e-21, -4.6828665442217759e-21, -8.6337888015837677e-21, -1.2672437182133225e-20, 1.3647541321311432e-19], [4.0929893002518389e-25, 3.8319712121528508e-24, 1.1541464451365079e-23, 2.5675512801734017e-23, 5.0795033282024643e-23, 9.6848513907231699e-23, 1.8727879125376868e-22, 3.8213652962073489e-22, 8.0458658738057720e-22, -1.6776312739848714e-21]],
        [[8.6097875469913090e-4, 7.8336224287683941e-3, 2.2249702005297749e-2, 4.5147436352245708e-2, 7.8368876178603352e-2, 1.2505849789123454e-1, 1.9075122383240213e-1, 2.8603982925453091e-1, 4.3461177737577478e-1, 7.0920200215537585e-1], [-2.4625599082705812e-5, -2.2561713748602427e-4, -6.4998264327843696e-4, -1.3484383186605073e-3, -2.4150772736459951e-3, -4.0207543204312948e-3, -6.4909124966978348e-3, -1.0512216215069511e-2, -1.7817211830612642e-2, -3.4636927244746053e-2], [3.5216900850635960e-7, 3.2490133418153970e-6, 9.4940011702360547e-6, 2.0137197831640139e-5, 3.7212461948672035e-5, 6.4635606272036161e-5, 1.1043688187032709e-4, 1.9316659281701356e-4, 3.6521445267164530e-4, 8.4582150141892504e-4], [-5.0363373849380231e-9, -4.6787545252275255e-8, -1.3867435872703044e-7, -3.0072280610410680e-7, -5.7338347367505179e-7, -1.0390478194149538e-6, -1.8789791747149833e-6, -3.5495168446142309e-6, -7.4861013840463111e-6, -2.0654642861976558e-5], [7.2023018234605351e-11, 6.7375490654108821e-10, 2.0255182365707970e-9, 4.4908348785446116e-9, 8.8347795509590020e-9, 1.6702962535493443e-8, 3.1968676000635671e-8, 6.5223187325716232e-8, 1.5344750791373939e-7, 5.0437558759198971e-7], [-1.0298282182013762e-12, -9.7008959403626670e-12, -2.9581273238265084e-11, -6.7055160187304067e-11, -1.3611170318212361e-10, -2.6847665849170120e-10, -5.4386256541654243e-10, -1.1984066174689803e-9, -3.1451516464752618e-9, -1.2316201951260499e-8], [1.4709676561776382e-14, 1.3953356377408786e-13, 4.3159678272528905e-13, 1.0003509325246282e-12, 2.0953380858630137e-12, 4.3125077938805679e-12, 9.2474256613525748e-12, 2.2010661148906703e-11, 6.4447962569320014e-11, 3.0070506094416912e-10], [-2.0876702991388877e-16, -1.9946111209885400e-15, -6.2608231791901501e-15, -1.4846365314326905e-14, -3.2112732572761619e-14, -6.9020242811342254e-14, -1.5680260632728902e-13, -4.0349066723849305e-13, -1.3191233961397427e-12, -7.3382118765787270e-12], [2.8630458793721587e-18, 2.7589968095624283e-17, 8.8116940653537915e-17, 2.1457704681278449e-16, 4.8143968620929449e-16, 1.0858655717931492e-15, 2.6262910388259992e-15, 7.3386681066279540e-15, 2.6886900608641419e-14, 1.7879982160918349e-13], [-3.2767816894505678e-20, -3.2161972801730376e-19, -1.0643363747147518e-18, -2.7266311650036372e-18, -6.5206911867331025e-18, -1.5860470720775134e-17, -4.1867556633044530e-17, -1.2968413255046325e-16, -5.4058990636964458e-16, -4.3381147654872627e-15], [-9.2308103530195718e-24, 2.0519875093253764e-22, 2.5032711467239091e-21, 1.2682488877538876e-20, 4.7648044430029763e-20, 1.6065987442138223e-19, 5.4482581745943278e-19, 2.0728586370012130e-18, 1.0439383120577996e-17, 1.0417415119644784e-16], [2.4685217582361220e-23, 2.2465365147356535e-22, 6.3516435768885682e-22, 1.2580521509904260e-21, 2.0028831200805853e-21, 2.3285446071068010e-21, -4.8235654538847403e-22, -2.1644389288051094e-20, -1.7937642424919512e-19, -2.4456831334281772e-18], [-1.4620162257329227e-24, -1.3524830329924919e-23, -3.9701884526334672e-23, -8.4542378956217409e-23, -1.5574519827141875e-22, -2.6291015313570443e-22, -3.9880586071845546e-22, -3.7399486999273680e-22, 2.0184975024748524e-21, 5.4823529229405463e-20], [6.4590695022737848e-26, 6.0053367964897131e-25, 1.7825250616209937e-24, 3.8715606897194331e-24, 7.3823732308082231e-24, 1.3293120413775445e-23, 2.3335000643002763e-23, 3.8771190684569090e-23, 2.9003815512127411e-23, -1.1195362374877276e-21]],
        [[8.1436639721033785e-4, 7.4067226655981078e-3, 2.1020780497092851e-2, 4.2601029823517461e-2, 7.3816202974378714e-2, 1.1749754941917254e-1, 1.7858713092616366e-1, 2.6643727684883425e-1, 4.0164121765249300e-1, 6.4599576044186734e-1], [-2.2031850825107654e-5, -2.0170122227268029e-4, -5.8017764338502557e-4, -1.2006480213763045e-3, -2.1426874626047076e-3, -3.5493751060845234e-3, -5.6896680639063459e-3, -9.1211719852303024e-3, -1.5217381945196451e-2, -2.8741066232925920e-2], [2.9802460467488211e-7, 2.7463822125628957e-6, 8.0065080226499574e-6, 1.6919258366483458e-5, 3.1098250406170061e-5, 5.3609899151721939e-5, 9.0634533037187823e-5, 1.5612638506446450e-4, 2.8827807175693192e-4, 6.3936091576316545e-4], [-4.0313750794240585e-9, -3.7394985890981774e-8, -1.1049057805948207e-7, -2.3842230665889498e-7, -4.5134957245032769e-7, -8.0972590711173876e-7, -1.4437780279969869e-6, -2.6724028248236360e-6, -5.4611390918598490e-6, -1.4222936149907004e-5], [5.4532280851507248e-11, 5.0917274344263286e-10, 1.5247784373164538e-9, 3.3597879312030488e-9, 6.5507279583171430e-9, 1.2230115808147834e-8, 2.2998880396025877e-8, 4.5743262802737679e-8, 1.0345572695272623e-7, 3.1639688025637701e-7], [-7.3764606088354183e-13, -6.9328362908237698e-12, -2.1041780721546193e-11, -4.7344707466956399e-11, -9.5073860321832741e-11, -1.8472202505477533e-10, -3.6636094383704661e-10, -7.8297748566582710e-10, -1.9598531589030286e-9, -7.0383955457789877e-9], [9.9768581849808766e-15, 9.4386389206995892e-14, 2.9034427913787041e-13, 6.6709785938939082e-13, 1.3797350877915436e-12, 2.7898130301213544e-12, 5.8356043697555219e-12, 1.3401451873167742e-11, 3.7126095794733623e-11, 1.5656979037878103e-10], [-1.3483768635354184e-16, -1.2840733268304486e-15, -4.0035581952102523e-15, -9.3937392178445382e-15, -2.0012299875787922e-14, -4.2115230888475882e-14, -9.2920985350632017e-14, -2.2932387725711480e-13, -7.0318633436275020e-13, -3.4826694202328044e-12], [1.8143126421003734e-18, 1.7395054523945398e-17, 5.4988729280054596e-17, 1.3181903857886270e-16, 2.8941929944700761e-16, 6.3430139572303941e-16, 1.4770733369733202e-15, 3.9197539825463747e-15, 1.3310355289482961e-14, 7.7447624847038700e-14], [-2.3860770096049692e-20, -2.3055541216847341e-19, -7.4038392567215720e-19, -1.8181781016618762e-18, -4.1271616426969503e-18, -9.4516117585467670e-18, -2.3305499292695254e-17, -6.6693500801630769e-17, -2.5136604037540089e-16, -1.7209211249335395e-15], [2.8020301889424657e-22, 2.7457498436323716e-21, 9.0622959371253994e-21, 2.3153820507346349e-20, 5.5292825667607221e-20, 1.3463703743916987e-19, 3.5708581931369931e-19, 1.1160627234098566e-18, 4.7113106620958243e-18, 3.8155138353402871e-17], [-1.4263739585355456e-24, -1.5518213086781846e-23, -6.0799751739034395e-23, -1.8875727258739686e-22, -5.4505519463995798e-22, -1.5781592027103101e-21, -4.8898551195177169e-21, -1.7653707609719264e-20, -8.6344011017598372e-20, -8.4127184789517364e-19], [-9.7952296890068113e-26, -8.7399337599737691e-25, -2.3542153206478292e-24, -4.1876994162395162e-24, -4.9463885612033137e-24, 9.9771199891989723e-25, 3.7614210317203823e-23, 2.2839017849635973e-22, 1.4856882809851385e-21, 1.8316679464327514e-20], [6.5145363947252769e-27, 5.9971875463857378e-26, 1.7413960093034576e-25, 3.6348621439865576e-25, 6.4544520379092664e-25, 1.0089393490590402e-24, 1.2194468252700597e-24, -5.4306232773474246e-25, -2.1182471840444583e-23, -3.8825307804844699e-22]],
        [[7.7254348083822912e-4, 7.0239615529482675e-3, 1.9920551748096984e-2, 4.0326628748146514e-2, 6.9763632072232632e-2, 1.1079908567158401e-1, 1.6788208486393067e-1, 2.4935045628036091e-1, 3.7332323451599784e-1, 5.9314248541271649e-1], [-1.9827369835865963e-5, -1.8139642359206581e-4, -5.2104408664464498e-4, -1.0758910868139733e-3, -1.9139181390471035e-3, -3.1562951429779622e-3, -5.0281489121731048e-3, -7.9890805548056324e-3, -1.3147846589495135e-2, -2.4232338199687690e-2], [2.5443525456103508e-7, 2.3423151043477623e-6, 6.8142424849869458e-6, 1.4352075366128261e-5, 2.6253525886947432e-5, 4.4956142752631054e-5, 7.5297734987232065e-5, 1.2798333925544625e-4, 2.3152305277524326e-4, 4.9499591478330409e-4], [-3.2650471917517175e-9, -3.0245579775711325e-8, -8.9117027597324650e-8, -1.9145252537071667e-7, -3.6012387459426324e-7, -6.4032502151397314e-7, -1.1276016185683722e-6, -2.0502653465023698e-6, -4.0769355846255117e-6, -1.0111321171811112e-5], [4.1898800401074143e-11, 3.9055163456047156e-10, 1.1654771238613947e-9, 2.5539209242373282e-9, 4.9398771265919397e-9, 9.1203575253218762e-9, 1.6886102915744453e-8, 3.2844803879977312e-8, 7.1791566879869833e-8, 2.0654475722548082e-7], [-5.3766676536664768e-13, -5.0430641477404769e-12, -1.5242153110251892e-11, -3.4068524628649289e-11, -6.7761022141264186e-11, -1.2990410291184123e-10, -2.5287322043338394e-10, -5.2616626531437285e-10, -1.2641913245427265e-9, -4.2191047657859392e-9], [6.8995416277355375e-15, 6.5118753327587457e-14, 1.9933550172477875e-13, 4.5445960618677715e-13, 9.2948039624153579e-13, 1.8502517981073476e-12, 3.7868120081421028e-12, 8.4290261342374774e-12, 2.2261316349229459e-11, 8.6183809451738606e-11], [-8.8530628307940686e-17, -8.4078495260591460e-16, -2.6067070169726395e-15, -6.0619075622179295e-15, -1.2749000109511952e-14, -2.6352297319237363e-14, -5.6705961061634477e-14, -1.3502690121799262e-13, -3.9199596007743671e-13, -1.7604653850486509e-12], [1.1354046296769192e-18, 1.0850639074645643e-17, 3.4072677321288553e-17, 8.0825973716728406e-17, 1.7480970148896639e-16, 3.7522218001261759e-16, 8.4897678301967815e-16, 2.1627374544888665e-15, 6.9020482023403745e-15, 3.5959585601443454e-14], [-1.4520796703523290e-20, -1.3965583011663438e-19, -4.4427385053144494e-19, -1.0753708255298628e-18, -2.3926678801549958e-18, -5.3353215011566909e-18, -1.2698063614380301e-17, -3.4619270188081350e-17, -1.2148765499457913e-16, -7.3442820265320352e-16], [1.8310232379229167e-22, 1.7734568694911127e-21, 5.7228248391560150e-21, 1.4159345956311277e-20, 3.2476257290299274e-20, 7.5392096537434025e-20, 1.8912429398130615e-19, 5.5277249136551028e-19, 2.1358135146870249e-18, 1.4993961183966348e-17], [-2.1596288042676028e-24, -2.1145024902053180e-23, -6.9703755558132600e-23, -1.7794253980729818e-22, -4.2516628813973457e-22, -1.0382994698270065e-21, -2.7708686666469276e-21, -8.7465256920419216e-21, -3.7399780652971038e-20, -3.0577642565269842e-19], [1.7668277491393816e-26, 1.8022450769637180e-25, 6.3952391522872457e-25, 1.7937641883265075e-24, 4.7526308558984369e-24, 1.2894850969569681e-23, 3.8212025451870486e-23, 1.3425691723227547e-22, 6.4714081590509968e-22, 6.2180364361854046e-21], [2.5197656807826122e-28, 2.0986711132780539e-27, 4.6235560259059870e-27, 3.8043098890320873e-27, -1.3442865991456231e-26, -9.2533186967198380e-26, -4.1345546740892856e-25, -1.8649218930809697e-24, -1.0828938305543863e-23, -1.2555166584765076e-22]],
        [[7.3480769166904956e-4, 6.6788281521710975e-3, 1.8929800560151200e-2, 3.8282846459806427e-2, 6.6133024471775547e-2, 1.0482344228989689e-1, 1.5838832750658128e-1, 2.3432407218445147e-1, 3.4873742794875153e-1, 5.4828938941024122e-1], [-1.7937976295822930e-5, -1.6401061137817221e-4, -4.7051234842796361e-4, -9.6961773922314740e-4, -1.7199279132203815e-3, -2.8250837973360625e-3, -4.4756536485759700e-3, -7.0554270102542419e-3, -1.1473577609423870e-2, -2.0707291694511907e-2], [2.1894911908771926e-7, 2.0137874512516477e-6, 5.8474432763552746e-6, 1.2279109929487975e-5, 2.2365165136566686e-5, 3.8069244280553976e-5, 6.3235327680829322e-5, 1.0621838770432473e-4, 1.8874226367056520e-4, 3.9102701747472403e-4], [-2.6724707364466003e-9, -2.4726082430995055e-8, -7.2670978700270583e-8, -1.5550101290160024e-7, -2.9082649770940751e-7, -5.1299977745761405e-7, -8.9343523401762405e-7, -1.5991017786426400e-6, -3.1048416886782452e-6, -7.3839752002613914e-6], [3.2619906434776145e-11, 3.0359666162880945e-10, 9.0314191243310239e-10, 1.9692441038256053e-9, 3.7817762864782875e-9, 6.9128971395142971e-9, 1.2623110241209363e-8, 2.4074235541988415e-8, 5.1075162922451273e-8, 1.3943560707692420e-7], [-3.9815522843424716e-13, -3.7276800624907830e-12, -1.1224084997800117e-11, -2.4938242801302584e-11, -4.9176505182786624e-11, -9.3154316280916871e-11, -1.7834857680894943e-10, -3.6243395843988408e-10, -8.4019490426371733e-10, -2.6330380969718726e-9], [4.8598375532143384e-15, 4.5769892896459713e-14, 1.3949079192631413e-13, 3.1581431587405364e-13, 6.3946854975529089e-13, 1.2552944543309604e-12, 2.5198384857736949e-12, 5.4563860533907882e-12, 1.3821341756421555e-11, 4.9721076555594246e-11], [-5.9318205746023897e-17, -5.6197652303405637e-16, -1.7335537655585674e-15, -3.9994033514582288e-15, -8.3153102771229092e-15, -1.6915558387495214e-14, -3.5601988257353187e-14, -8.2144821367600639e-14, -2.2736292441588553e-13, -9.3890906640533555e-13], [7.2399039489154068e-19, 6.8997876701041319e-18, 2.1543178748832654e-17, 5.0645551685327157e-17, 1.0812420201662522e-16, 2.2793711097242144e-16, 5.0299848477358810e-16, 1.2366562198804608e-15, 3.7401181508049333e-15, 1.7729841245047353e-14], [-8.8337664399031336e-21, -8.4688962381564697e-20, -2.6764911834985492e-19, -6.4118744213256005e-19, -1.4056652041275976e-18, -3.0709779921535598e-18, -7.1057600121872019e-18, -1.8615994273528749e-17, -6.1522460496449028e-17, -3.3479528962588464e-16], [1.0760666968533724e-22, 1.0378405360846773e-21, 3.3204470936172604e-21, 8.1075356727462547e-21, 1.8255837625225118e-20, 4.1343359935858577e-20, 1.0032849188093252e-19, 2.8014503922660873e-19, 1.0118387395377019e-18, 6.3216344510027921e-18], [-1.3001151506727066e-24, -1.2620164953727104e-23, -4.0907182539623914e-23, -1.0191270270115482e-22, -2.3598842751453341e-22, -5.5468997812779732e-22, -1.4133765969155833e-21, -4.2103382319199154e-21, -1.6631402654128103e-20, -1.1934401995102879e-19], [1.5130907710388107e-26, 1.4814488029647950e-25, 4.8848414079891402e-25, 1.2483901882298262e-24, 2.9906597342045992e-24, 7.3391432024244515e-24, 1.9737586993999216e-23, 6.2980789129499150e-23, 2.7282322381759228e-22, 2.2518648791712353e-21], [-1.4760877359482172e-28, -1.4768796783413492e-27, -5.0703119040958402e-27, -1.3683426307143002e-26, -3.4949707631713586e-26, -9.2028879459932090e-26, -2.6705916774288083e-25, -9.2727567928965588e-25, -4.4473473766458644e-24, -4.2415367219173233e-23]],
        [[7.0058766654216345e-4, 6.3660324223673544e-3, 1.8032956766571579e-2, 3.6436289506443615e-2, 6.2861718574172105e-2, 9.9459574837756178e-2, 1.4991120971726576e-1, 2.2100648542027344e-1, 3.2719125914968397e-1, 5.0974680521861324e-1], [-1.6306355971885412e-5, -1.4900988859952910e-4, -4.2699131005068366e-4, -8.7834868109286773e-4, -1.5540073179638449e-3, -2.5434052275915279e-3, -4.0094737336775904e-3, -6.2763968561948359e-3, -1.0099949299889003e-2, -1.7899201000275176e-2], [1.8976728950549600e-7, 1.7439391937739923e-6, 5.0552325172889470e-6, 1.0586923312262350e-5, 1.9208341730519683e-5, 3.2520298635304281e-5, 5.3618003788179989e-5, 8.9122175354879388e-5, 1.5588585117654279e-4, 3.1425542364142654e-4], [-2.2084409433396758e-9, -2.0410215322335414e-8, -5.9849873291165893e-8, -1.2760643651951099e-7, -2.3742513163160904e-7, -4.1580862216615694e-7, -7.1702435808275670e-7, -1.2654971190856016e-6, -2.4059921366776146e-6, -5.5173675788187261e-6], [2.5701012067390244e-11, 2.3887122370325853e-10, 7.0857419888030105e-10, 1.5380674963525105e-9, 2.9346985749193331e-9, 5.3165812567904431e-9, 9.5886436187056261e-9, 1.7969522752860018e-8, 3.7134852946868720e-8, 9.6868161063393737e-8], [-2.9909879134742288e-13, -2.7956324928861365e-12, -8.3889466184030841e-12, -1.8538654269532629e-11, -3.6274406246056606e-11, -6.7978475219388187e-11, -1.2822728405880966e-10, -2.5515960637098585e-10, -5.7315120791752563e-10, -1.7007097089276320e-9], [3.4807999286068093e-15, 3.2718719316575452e-14, 9.9318350925134663e-14, 2.2345032502698463e-13, 4.4837057196185384e-13, 8.6918127547458390e-13, 1.7147613768957415e-12, 3.6231581440959045e-12, 8.8461990208713979e-12, 2.9859279281545365e-11], [-4.0508224821602451e-17, -3.8292371751222585e-16, -1.1758484103773988e-15, -2.6932927558671621e-15, -5.5420916107948468e-15, -1.1113456270051195e-14, -2.2931201669474197e-14, -5.1447296949554073e-14, -1.3653504434806960e-13, -5.2423790147268568e-13], [4.7141723515428894e-19, 4.4815308820115625e-18, 1.3921032581632896e-17, 3.2462695954145962e-17, 6.8502900719250508e-17, 1.4209762867151969e-16, 3.0665432226809312e-16, 7.3052862563487258e-16, 2.1073234495634617e-15, 9.2040154499729134e-15], [-5.4859904438239978e-21, -5.2447929218636416e-20, -1.6480876780030267e-19, -3.9126919088175582e-19, -8.4671225246263640e-19, -1.8168449551303127e-18, -4.1007800127178544e-18, -1.0373102336021779e-17, -3.2524933626110491e-17, -1.6159409650998293e-16], [6.3830711322692004e-23, 6.1370347716978432e-22, 1.9508489449901948e-21, 4.7153046141834353e-21, 1.0464438586939825e-20, 2.3228062127111447e-20, 5.4835086675685730e-20, 1.4728693168794681e-19, 5.0198799684234994e-19, 2.8370734367249906e-18], [-7.4200122392215450e-25, -7.1747783487970956e-24, -2.3074023550578730e-23, -5.6787182796412791e-23, -1.2925899424759192e-22, -2.9684746575681645e-22, -7.3304848352973124e-22, -2.0909807829493437e-21, -7.7470540151344612e-21, -4.9808640417886378e-20], [8.5871511065465873e-27, 8.3527107138936122e-26, 2.7188630622954136e-25, 6.8173956709599508e-25, 1.5926960808393439e-24, 3.7868942068275230e-24, 9.7883443349410188e-24, 2.9665949068368288e-23, 1.1952428394577759e-22, 8.7438581629479157e-22], [-9.7477147301841008e-29, -9.5516440565315122e-28, -3.1523938282772553e-27, -8.0761466456245347e-27, -1.9425516662642989e-26, -4.7965842133850886e-26, -1.3011674620662426e-25, -4.1984924139295238e-25, -1.8418975788819066e-24, -1.5341353972401562e-23]],
        [[6.6941382453190727e-4, 6.0812317968028116e-3, 1.7217269850081452e-2, 3.4759716338907983e-2, 5.9898877875156125e-2, 9.4618083051779654e-2, 1.4229568042457357e-1, 2.0912179265592605e-1, 3.0815361882691844e-1, 4.7626982675815724e-1], [-1.4887659084310639e-5, -1.3597708156760599e-4, -3.8924147354787822e-4, -7.9938645413299164e-4, -1.4109903359412245e-3, -2.3018519960804124e-3, -3.6125201479516437e-3, -5.6196350048951291e-3, -8.9590516185761483e-3, -1.5625997789505195e-2], [1.6554960839479303e-7, 1.5202320294189854e-6, 4.3999114275656289e-6, 9.1919435823470227e-6, 1.6618789856705223e-5, 2.7999524197500700e-5, 4.5856282426903550e-5, 7.5506950249320956e-5, 1.3023472872046105e-4, 2.5633768212822815e-4], [-1.8408987393119245e-9, -1.6996286408144491e-8, -4.9735760154043059e-8, -1.0569584508724528e-7, -1.9573782276585169e-7, -3.4058373719070617e-7, -5.8208634191409808e-7, -1.0145319991382750e-6, -1.8931785736893422e-6, -4.2051079338377605e-6], [2.0470650466328157e-11, 1.9001951417150215e-10, 5.6220355312681307e-10, 1.2153699126061985e-9, 2.3054202857325457e-9, 4.1428304715940864e-9, 7.3888351061668599e-9, 1.3631528936781695e-8, 2.7520501996809441e-8, 6.8982962583324316e-8], [-2.2763203721296508e-13, -2.1244297067867594e-12, -6.3550418057040951e-12, -1.3975232637260590e-11, -2.7153478141381502e-11, -5.0393023613512364e-11, -9.3791728612770664e-11, -1.8315694454751775e-10, -4.0005630769942123e-10, -1.1316354302857010e-9], [2.5312504947595789e-15, 2.3751253011465321e-14, 7.1836180950306088e-14, 1.6069768095333768e-13, 3.1981646772002947e-13, 6.1297628224909622e-13, 1.1905649814891786e-12, 2.4609467078767132e-12, 5.8154843644511530e-12, 1.8563985914644521e-11], [-2.8147306788789921e-17, -2.6554043832628184e-16, -8.1202246068044172e-16, -1.8478220988076311e-15, -3.7668312364584836e-15, -7.4561890722063073e-15, -1.5112685986159757e-14, -3.3065951218279786e-14, -8.4537744665952536e-14, -3.0453409423587574e-13], [3.1299573101563460e-19, 2.9687570659781789e-18, 9.1789437571652423e-18, 2.1247634040604796e-17, 4.4366114359080540e-17, 9.0696402895687942e-17, 1.9183601406630927e-16, 4.4428308783545411e-16, 1.2288967347905068e-15, 4.9957488440187030e-15], [-3.4804779351004238e-21, -3.3190790529660223e-20, -1.0375675849086351e-19, -2.4432062283787842e-19, -5.2254763425969437e-19, -1.1032212547117239e-18, -2.4351077483734373e-18, -5.9695039240054550e-18, -1.7864050900627427e-17, -8.1953063856906324e-17], [3.8701906897764777e-23, 3.7106827933666976e-22, 1.1728269404300573e-21, 2.8093399701116135e-21, 6.1545445674595039e-21, 1.3419357242395742e-20, 3.0910337078080558e-20, 8.0207523989638785e-20, 2.5968307318223501e-19, 1.3444029446009553e-18], [-4.3031408175063919e-25, -4.1481237085217706e-24, -1.3256127260576369e-23, -3.2301190818037200e-23, -7.2483928805460979e-23, -1.6322345354460485e-22, -3.9235280034387742e-22, -1.0776664505276041e-21, -3.7748831734153632e-21, -2.2054254668863801e-20], [4.7822196373815915e-27, 4.6350487432189256e-26, 1.4976965202519720e-25, 3.7126543943427586e-25, 8.5343421338842428e-25, 1.9849409379647275e-24, 4.9795842788726740e-24, 1.4478413506153961e-23, 5.4871668210730792e-23, 3.6178500261169422e-22], [-5.3059920233566744e-29, -5.1716523568129823e-28, -1.6901978800444731e-27, -4.2632438074462899e-27, -1.0039677785927149e-26, -2.4123338308054783e-26, -6.3167586207912394e-26, -1.9444170405691091e-25, -7.9736674158434985e-25, -5.9330696363494679e-24]],
        [[6.4089666409801938e-4, 5.8208281056126300e-3, 1.6472198172129321e-2, 3.3230682692408540e-2, 5.7202826522324872e-2, 9.0226181070188046e-2, 1.3541670172970617e-1, 1.9845047200634227e-1, 2.9121036448812097e-1, 4.4692094036770689e-1], [-1.3646383148158449e-5, -1.2458240149685495e-4, -3.5628566641430178e-4, -7.3061368840615886e-4, -1.2868470891028918e-3, -2.0931487062322610e-3, -3.2717334137242181e-3, -5.0608281660608298e-3, -8.0011232959519413e-3, -1.3759954143854008e-2], [1.4528377463816907e-7, 1.3332101963084822e-6, 3.8531431799752730e-6, 8.0316791356259664e-6, 1.4474594451082683e-5, 2.4279380188958248e-5, 3.9523335725032279e-5, 6.4529908816684408e-5, 1.0991705963067801e-4, 2.1182307757294450e-4], [-1.5467376918814086e-9, -1.4267259309378268e-8, -4.1670810153008067e-8, -8.8292719889175742e-8, -1.6281179504345872e-7, -2.8162753109931537e-7, -4.7745151248595323e-7, -8.2281179981860756e-7, -1.5100079765006963e-6, -3.2608405321257013e-6], [1.6467065874632748e-11, 1.5268011658197250e-10, 4.5065971797496153e-10, 9.7060704913317047e-10, 1.8313245800986631e-9, 3.2667253305352998e-9, 5.7677304456466281e-9, 1.0491557641017070e-8, 2.0744041887167355e-8, 5.0197934511088235e-8], [-1.7531366820344672e-13, -1.6338960057696033e-12, -4.8737756874505709e-12, -1.0669940228216081e-11, -2.0598935824657052e-11, -3.7892227167152727e-11, -6.9675587202177205e-11, -1.3377637724364055e-10, -2.8497549715487376e-10, -7.7275555315609815e-10], [1.8664455758823276e-15, 1.7485028284150490e-14, 5.2708703479055230e-14, 1.1729527880970711e-13, 2.3169904538713594e-13, 4.3952911068142252e-13, 8.4169804688421137e-13, 1.7057637881855209e-12, 3.9149088885932259e-12, 1.1895930593678469e-11], [-1.9870778546881946e-17, -1.8711485437835133e-16, -5.7003185882261862e-16, -1.2894338769419280e-15, -2.6061757736079814e-15, -5.0982972813217818e-15, -1.0167917191854465e-14, -2.1749954344460232e-14, -5.3781857547648178e-14, -1.8312798146887233e-13], [2.1155067942635962e-19, 2.0023969803262101e-18, 6.1647563086372876e-18, 1.4174821900074406e-17, 2.9314544747123302e-17, 5.9137458986898807e-17, 1.2283091200138797e-16, 2.7733060870274134e-16, 7.3883920841423949e-16, 2.8191033254036900e-15], [-2.2522359105223589e-21, -2.1428511946897297e-20, -6.6670332419954914e-20, -1.5582461980392859e-19, -3.2973309956288051e-19, -6.8596209163562702e-19, -1.4838271584375322e-18, -3.5362033793537364e-18, -1.0149953566466566e-17, -4.3397755863317485e-17], [2.3977988100459242e-23, 2.2931542907109807e-22, 7.2102247688959744e-22, 1.7129870517963729e-21, 3.7088694889106203e-21, 7.9567785209773333e-21, 1.7924982273998275e-20, 4.5089614327251708e-20, 1.3943702108465564e-19, 6.6807238065584630e-19], [-2.5527481753361821e-25, -2.4539801645748112e-24, -7.7976147638273833e-24, -1.8830823247793513e-23, -4.1717501588411088e-23, -9.2293834566599124e-23, -2.1653741469839206e-22, -5.7493011144074471e-22, -1.9155423019718208e-21, -1.0284415615511714e-20], [2.7176090904091544e-27, 2.6260158241671259e-26, 8.4326075324505278e-26, 2.0700193330303798e-25, 4.6923122971969377e-25, 1.0705377782320530e-24, 2.6157893413014821e-24, 7.3307917574097068e-24, 2.6315037998861712e-23, 1.5831979836749826e-22], [-2.8928568296093075e-29, -2.8135041137749662e-28, -9.1326145261398958e-28, -2.2780189922500979e-27, -5.2817759305016477e-27, -1.2422615278571641e-26, -3.1604838785963343e-26, -9.3473650034240615e-26, -3.6146068724328390e-25, -2.4366509189865761e-24]],
        [[6.1471038739708005e-4, 5.5818145939600631e-3, 1.5788950402840701e-2, 3.1830529881433743e-2, 5.4739074391293064e-2, 8.6224008303468675e-2, 1.2917232023631823e-1, 1.8881567694748785e-1, 2.7603379082901495e-1, 4.2098062707131718e-1], [-1.2554128869016510e-5, -1.1456236311493977e-4, -3.2734512741563355e-4, -6.7034958275778647e-4, -1.1783966426905542e-3, -1.9115973357120378e-3, -2.9769948040477159e-3, -4.5814200067011927e-3, -7.1890271787112171e-3, -1.2209317806370663e-2], [1.2819545178603434e-7, 1.1756512888014077e-6, 3.3933488201811807e-6, 7.0587666114482131e-6, 1.2683979980900503e-5, 2.1190179196032323e-5, 3.4304942603466941e-5, 5.5581744103905592e-5, 9.3615552684747696e-5, 1.7704786362022615e-4], [-1.3090572854628347e-9, -1.2064659939614670e-8, -3.5176378846184757e-8, -7.4328659786604534e-8, -1.3652733071994305e-7, -2.3489449685422632e-7, -3.9530773967998256e-7, -6.7431719272917558e-7, -1.2190622578842216e-6, -2.5673789895230808e-6], [1.3367330531221153e-11, 1.2380883757370288e-10, 3.6464793167479949e-10, 7.8267918034178651e-10, 1.4695475758853739e-9, 2.6038205784841280e-9, 4.5552680515224383e-9, 8.1808097917922513e-9, 1.5874635634553106e-8, 3.7229677563255236e-8], [-1.3649939350627091e-13, -1.2705396039383003e-12, -3.7800398573128083e-12, -8.2415948450886725e-12, -1.5817859079202492e-11, -2.8863518284707896e-11, -5.2491932078023505e-11, -9.9249506865682219e-11, -2.0671959524610830e-10, -5.3986921958906438e-10], [1.3938523016028410e-15, 1.3038414032317176e-14, 3.9184923542532153e-14, 8.6783815508923471e-14, 1.7025965674838995e-13, 3.1995395329631086e-13, 6.0488272085999243e-13, 1.2040940767097975e-12, 2.6919037414244748e-12, 7.8286677010056366e-12], [-1.4233207843595255e-17, -1.3380160674911116e-16, -4.0620159858412075e-16, -9.1383170060761241e-16, -1.8326342753785357e-15, -3.5467101136677731e-15, -6.9702731728592562e-15, -1.4608057926238006e-14, -3.5053985782201372e-14, -1.1352386049576884e-13], [1.4534122799068095e-19, 1.3730864730033188e-18, 4.2107964875845416e-18, 9.6226280312488916e-18, 1.9726037553340641e-17, 3.9315509268647090e-17, 8.0320872766975482e-17, 1.7722482018961879e-16, 4.5647320139174399e-16, 1.6462145784055717e-15], [-1.4841399406653683e-21, -1.4090760802410608e-20, -4.3650263533524603e-20, -1.0132606372609083e-19, -2.1232635382750986e-19, -4.3581494022437362e-19, -9.2556523982456901e-19, -2.1500898277500806e-18, -5.9441965974368553e-18, -2.3871831196796231e-17], [1.5155170757195072e-23, 1.4460088542722653e-22, 4.5249048083259564e-22, 1.0669611565335812e-21, 2.2854299672670939e-21, 4.8310362771302967e-21, 1.0665608433423505e-20, 2.6084868563526288e-20, 7.7405360320708555e-20, 3.4616648903355573e-19], [-1.5475558794795118e-25, -1.4839084149200666e-24, -4.6906354747352773e-24, -1.1235069312142229e-23, -2.4599807195711861e-23, -5.3552322801436712e-23, -1.2290346147924005e-22, -3.1646131394502775e-22, -1.0079729315666609e-21, -5.0197755289510011e-21], [1.5802834073211983e-27, 1.5228375173013657e-26, 4.8625259416606257e-26, 1.1830672368136237e-25, 2.6478972761297501e-25, 5.9363535516034879e-25, 1.4162654799288166e-24, 3.8393144647571194e-24, 1.3125842177087291e-23, 7.2792007049859127e-23], [-1.6200262373347352e-29, -1.5692697293146556e-28, -5.0529358339781595e-28, -1.2487245525592248e-27, -2.8547185743722944e-27, -6.5874675098593328e-27, -1.6330040557357618e-26, -4.6588265604504936e-26, -1.7092260502865166e-25, -1.0553771112722705e-24]],
        [[5.9058038590066900e-4, 5.3616591851009429e-3, 1.5160136658990326e-2, 3.0543618814239529e-2, 5.2478832069459023e-2, 8.2561881697942448e-2, 1.2347857352817864e-1, 1.8007334413131228e-1, 2.6236119074518977e-1, 3.9788745985742536e-1], [-1.1587960397281331e-5, -1.0570440721748704e-4, -3.0179305063448854e-4, -6.1724616958104417e-4, -1.0831010801852405e-3, -1.7526839185443951e-3, -2.7203659744923462e-3, -4.1670494036115767e-3, -6.4945927970770297e-3, -1.0906801856655370e-2], [1.1368547734968757e-7, 1.0419742582901571e-6, 3.0038992213588949e-6, 6.2368646652447598e-6, 1.1176963202475171e-5, 1.8603627092481177e-5, 2.9966296271987923e-5, 4.8214522854302299e-5, 8.0384860809712146e-5, 1.4948740377865547e-4], [-1.1153289549780074e-9, -1.0271192881347618e-8, -2.9899331721223499e-8, -6.3019396100879755e-8, -1.1533965639487536e-7, -1.9746569095215501e-7, -3.3009489189340820e-7, -5.5786240788344751e-7, -9.9493933635146029e-7, -2.0488576011717741e-6], [1.0942107178615334e-11, 1.0124760987758270e-10, 2.9760320553342185e-10, 6.3676935416774874e-10, 1.1902371061167856e-9, 2.0959729470696099e-9, 3.6361730080062358e-9, 6.4547038465972639e-9, 1.2314561138107737e-8, 2.8081412639254954e-8], [-1.0734923447823163e-13, -9.9804167094731401e-13, -2.9621955691034006e-12, -6.4341335445059929e-12, -1.2282543689284836e-11, -2.2247422190986084e-11, -4.0054403957337812e-11, -7.4683651664838339e-11, -1.5241976116885320e-10, -3.8488069418054716e-10], [1.0531662644989841e-15, 9.8381302842664762e-15, 2.9484234129398148e-14, 6.5012667769798771e-14, 1.2674859379174312e-13, 2.3614226263539042e-13, 4.4122083103415986e-13, 8.6412141572259950e-13, 1.8865295591305095e-12, 5.2751316557978757e-12], [-1.0332250491178859e-17, -9.6978723741257489e-17, -2.9347152877233645e-16, -6.5691004721393590e-16, -1.3079705991234138e-15, -2.5065002013895756e-15, -4.8602850748820884e-15, -9.9982500113606841e-15, -2.3349949836994723e-14, -7.2300363220821974e-14], [1.0136614112940971e-19, 9.5596140584285979e-19, 2.9210708954736288e-18, 6.6376419379706009e-18, 1.3497483773536802e-17, 2.6604908367479498e-17, 5.3538657620398186e-17, 1.1568397850857265e-16, 2.8900695180478920e-16, 9.9094067463357528e-16], [-9.9446820091075872e-22, -9.4233268218438603e-21, -2.9074899375951270e-20, -6.7068985545369205e-20, -1.3928605750923072e-19, -2.8239421183541600e-19, -5.8975714682531612e-19, -1.3385125261018392e-18, -3.5770962575002033e-18, -1.3581721817162030e-17], [9.7563839981011379e-24, 9.2889825009644802e-23, 2.8939721022807945e-22, 6.7768777483404813e-22, 1.4373498081753624e-21, 2.9974352645765414e-21, 6.4964925649094661e-21, 1.5487155627139532e-20, 4.4274428485179807e-20, 1.8614955681801170e-19], [-9.5716485037735250e-26, -9.1565511016286395e-25, -2.8805162699516807e-24, -6.8475857722332115e-24, -1.4832597965796316e-23, -3.1815868431746412e-23, -7.1562359182487617e-23, -1.7919292775759688e-22, -5.4799335345520543e-22, -2.5513449413453694e-21], [9.3902621325058298e-28, 9.0264070833735776e-27, 2.8672389238823021e-26, 6.9192511371537872e-26, 1.5306730191104922e-25, 3.3771107178907757e-25, 7.8830763199041430e-25, 2.0733517350564671e-24, 6.7826406006697986e-24, 3.4968473393010228e-23], [-9.2523875591156396e-30, -8.9465278733190107e-29, -2.8673685224595884e-28, -7.0192420742509262e-28, -1.5842299129100970e-27, -3.5919654375088457e-27, -8.6942332516670764e-27, -2.4003628665687495e-26, -8.3960269253312792e-26, -4.7922105431377133e-25]],
        [[5.6827356508235974e-4, 5.1582143487505989e-3, 1.4579499897889432e-2, 2.9356742797029584e-2, 5.0397879566831290e-2, 7.9198220508010310e-2, 1.1826568857642782e-1, 1.7210493154550241e-1, 2.4997949745012030e-1, 3.7719693097596060e-1], [-1.0729190826537653e-5, -9.7835529078518659e-5, -2.7912034260075533e-4, -5.7021224049160353e-4, -9.9891558768034470e-4, -1.6127950776452908e-3, -2.4955484811329260e-3, -3.8064615790748837e-3, -5.8961381656747070e-3, -9.8021531488303347e-3], [1.0128531649679680e-7, 9.2782018184181402e-7, 2.6718394389111120e-6, 5.5377737485126123e-6, 9.8995469639508287e-6, 1.6421505090596050e-5, 2.6329539432141535e-5, 4.2093941245206288e-5, 6.9534593083304017e-5, 1.2736345190365285e-4], [-9.5614995610687830e-10, -8.7989536923962948e-9, -2.5575799745745681e-8, -5.3781620091627978e-8, -9.8107418985265276e-8, -1.6720402559399477e-7, -2.7779249810205155e-7, -4.6549790474583452e-7, -8.2003838773805010e-7, -1.6548862922785241e-6], [9.0262119938391841e-12, 8.3444602301326246e-11, 2.4482067414240542e-10, 5.2231506577116598e-10, 9.7227334695214190e-10, 1.7024740436762543e-9, 2.9308781568573651e-9, 5.1477313103210246e-9, 9.6709123839754786e-9, 2.1502625748892838e-8], [-8.5208917740742958e-14, -7.9134427758650668e-13, -2.3435107829819339e-12, -5.0726071000974611e-12, -9.6355145306135633e-12, -1.7334617746759949e-11, -3.0922529690445084e-11, -5.6926438063621523e-11, -1.1405142458819357e-10, -2.7939255781758022e-10], [8.0438612205252258e-16, 7.5046887203981622e-15, 2.2432920786574251e-14, 4.9264025639327608e-14, 9.5490779995875550e-14, 1.7650135315861137e-13, 3.2625131147782336e-13, 6.2952379509666781e-13, 1.3450362214168794e-12, 3.6302636838604638e-12], [-7.5935365746450391e-18, -7.1170480895878945e-17, -2.1473591616082256e-16, -4.7844119883525928e-16, -9.4634168577556297e-16, -1.7971395805730364e-15, -3.4421478225258763e-15, -6.9616196282977878e-15, -1.5862339672259175e-14, -4.7169525621218950e-14], [7.1684227424060987e-20, 6.7494303090069389e-19, 2.0555287529340358e-18, 4.6465139170168367e-18, 9.3785241493471483e-18, 1.8298503746563153e-17, 3.6316732577725640e-17, 7.6985410601537957e-17, 1.8706843419619011e-16, 6.1289326095515258e-16], [-6.7671083303739868e-22, -6.4008011355978468e-21, -1.9676254115015729e-20, -4.5125903941501433e-20, -9.2943929807913072e-20, -1.8631565570809733e-19, -3.8316340061436216e-19, -8.5134692238898853e-19, -2.2061435951618408e-18, -7.9635769996619103e-18], [6.3882610515983074e-24, 6.0701797471752914e-23, 1.8834811983501424e-22, 4.3825268642635270e-22, 9.2110165186441783e-22, 1.8970689644256899e-21, 4.0426046371071370e-21, 9.4146615124026720e-21, 2.6017588606201802e-20, 1.0347406745390581e-19], [-6.0306186967749009e-26, -5.7566338867128538e-25, -1.8029347245233056e-24, -4.2562107743929995e-24, -9.1283862880351187e-24, -1.9315984283855580e-23, -4.2651908852019979e-23, -1.0411248683573368e-22, -3.0683174702531302e-22, -1.3444815704007362e-21], [5.6936255940605886e-28, 5.4594738928036201e-27, 1.7259382094316425e-26, 4.1337170728495634e-26, 9.0468512589404928e-26, 1.9668077304196572e-25, 4.5001133810407776e-25, 1.1513442942807072e-24, 3.6185590655679963e-24, 1.7469433158146567e-23], [-5.3776366172878796e-30, -5.2133492903746644e-29, -1.6642499909834533e-28, -4.0415738930791856e-28, -9.0116088979997441e-28, -2.0096231560505276e-27, -4.7583526330856274e-27, -1.2746189117731046e-26, -4.2691123691090591e-26, -2.2698345603584299e-25]],
    ],
    [
        [[4.6317526843855861e-3, 4.2792254206200702e-2, 1.2544826880175152e-1, 2.6764383921186636e-1, 4.9953239630718094e-1, 8.8206403351571080e-1, 1.5485332045811645e+0, 2.8329684148654649e+0, 5.7746630364429716e+0, 15.088489547660412e+0, 82.162595159690470e+0], [-2.5042887330532328e-4, -2.3181033352702157e-3, -6.8209212422861850e-3, -1.4629686935358833e-2, -2.7484546274701451e-2, -4.8891387274996421e-2, -8.6494949244128195e-2, -1.5941144652598276e-1, -3.2704511320297095e-1, -8.5874968707839167e-1, -4.6898692776267512e+0], [5.0624562075068078e-6, 4.5864996702696831e-5, 1.2922613532298728e-4, 2.5945756882280712e-4, 4.4572804952939867e-4, 7.0808233582009151e-4, 1.0940691478435981e-3, 1.7310505872634064e-3, 3.0324087153495774e-3, 6.9099468244778251e-3, 3.4309415111919015e-2], [-9.0577737138926201e-8, -7.7451126690198902e-7, -1.9325050638991929e-6, -3.1802077803261906e-6, -4.0337091382620105e-6, -4.0268145021205460e-6, -2.8615306154527343e-6, -5.5782688177567668e-7, 2.4607743172538219e-6, 5.4163909932543668e-6, 7.3158589404169105e-6], [1.5101670998279183e-9, 1.1558091289093241e-8, 2.2130138961877922e-8, 1.9991753311996766e-8, -2.5946557950332420e-9, -3.9915623749723302e-8, -7.1815634985184653e-8, -7.3352563118056127e-8, -3.2286009920122629e-8, 3.6908679441452625e-8, 9.5229728805964437e-8], [-2.3989935576687341e-11, -1.5179336766371062e-10, -1.5129613957451739e-10, 1.6317991924413965e-10, 5.8295999679631162e-10, 5.8444680234819095e-10, -1.1902093567754956e-10, -1.0559033556832497e-9, -1.2387102173304514e-9, -2.1766836681327039e-10, 1.1547764468518934e-9], [3.6701887565707802e-13, 1.6807371067293468e-12, -7.4565405607106909e-13, -5.9433718240846631e-12, -4.2090875221349702e-12, 7.6202874387297222e-12, 1.4310947523222220e-11, 6.3891402283171827e-13, -1.9044400180578329e-11, -1.3995599944173476e-11, 1.2413568239380081e-11], [-5.4383010299558872e-15, -1.3478175730314315e-14, 4.4105160031608371e-14, 5.5598897466185122e-14, -9.7221134497458045e-14, -1.5333439953758809e-13, 1.1780617123384872e-13, 2.6369623458040408e-13, -1.0267552867375508e-13, -3.1358433250827186e-13, 1.0274496839551939e-13], [7.8227637443656963e-17, 1.2722539373926785e-17, -7.6308801152002589e-16, 5.2814842891876121e-16, 1.9981708766590215e-15, -1.7469434417589309e-15, -3.1556988976790677e-15, 3.4767815492507191e-15, 2.6684903971545621e-15, -4.8126097867166492e-15, 1.9874393781418922e-16], [-1.0929231691357184e-18, 2.3484201439732740e-18, 6.2949793621544684e-18, -2.2951450214323887e-17, 7.1259645160402038e-18, 4.7684819811250204e-17, -5.3354087195526816e-17, -2.6197666745303303e-17, 8.2866833687870804e-17, -4.8310115762601132e-17, -1.7343740599303438e-17], [1.4804393750403690e-20, -6.1541746387899513e-20, 4.6345994783911656e-20, 2.4484779645779701e-19, -6.5264749362880170e-19, 4.2151440681374168e-19, 6.3881299508548994e-19, -1.4065613375538822e-18, 9.9525327234964966e-19, -4.6533895504200242e-20, -5.4679993960373051e-19], [-1.9374759397105139e-22, 1.0599677701361862e-21, -2.6309477771372358e-21, 2.2459724909790737e-21, 4.5838974011875353e-21, -1.6018491982210326e-20, 2.0858314175697111e-20, -1.1940993775518157e-20, -2.9414182248755266e-21, 1.1330242451654686e-20, -1.1886761962980926e-20], [2.4322622603820016e-24, -1.3627935661702267e-23, 4.7740986292023632e-23, -1.1048371866861314e-22, 1.5586029730353106e-22, -9.8556164996720942e-23, -8.1788914736029172e-23, 2.7798827211264279e-22, -3.6155927682533013e-22, 3.1221859663641856e-22, -2.1935772789324404e-22], [-2.8940973485997723e-26, 1.1263464473120074e-25, -3.9394369725838078e-25, 1.2833530670212966e-24, -3.1345463574214975e-24, 5.5992709202198339e-24, -7.5380838929182529e-24, 7.9480828535765406e-24, -6.9275817337017511e-24, 5.2245455368552587e-24, -3.6308301350319542e-24]],
        [[4.1682203607225912e-3, 3.8495611721526948e-2, 1.1277089477297267e-1, 2.4034324987158617e-1, 4.4797590821500360e-1, 7.8978585652900485e-1, 1.3841732924705162e+0, 2.5279575989070696e+0, 5.1449180449986001e+0, 13.426482354805721e+0, 73.057629438378566e+0], [-2.1389978276472948e-4, -1.9854332190027947e-3, -5.8740873997303657e-3, -1.2701038184592183e-2, -2.4112199285394255e-2, -4.3429927451423645e-2, -7.7899338391672856e-2, -1.4561135564456132e-1, -3.0267855630838380e-1, -8.0320055214487621e-1, -4.4150150277102703e+0], [4.1060861827612941e-6, 3.7587007350892134e-5, 1.0805859658964665e-4, 2.2329838672548872e-4, 3.9743921456743963e-4, 6.5634236889201659e-4, 1.0528208998245456e-3, 1.7166279925695293e-3, 3.0579383873407280e-3, 6.9782750156960720e-3, 3.4407164744723586e-2], [-6.9821972573804053e-8, -6.1180369825170054e-7, -1.6032295505491584e-6, -2.8414265229053507e-6, -3.9882328751463821e-6, -4.5635683527768661e-6, -4.0100670905314269e-6, -1.8968578505419191e-6, 1.7204046627887431e-6, 5.9505337722980296e-6, 9.0414680912349884e-6], [1.1074401510032181e-9, 8.8955464201893268e-9, 1.9011948259454446e-8, 2.1961927969243215e-8, 7.8715948685358664e-9, -2.6771186105289187e-8, -7.0559967451753504e-8, -9.3659432534572880e-8, -6.1801210806471160e-8, 2.8388448383010285e-8, 1.2153816325377432e-7], [-1.6758527298090147e-11, -1.1587514916003484e-10, -1.5691454793061843e-10, 4.0437340394835368e-11, 4.5656973302149786e-10, 7.1116387030096444e-10, 2.5105756146945198e-10, -9.4067533260561042e-10, -1.7176070519384902e-9, -6.7791969683903551e-10, 1.4871860083627020e-9], [2.4460502129767455e-13, 1.3188456832711603e-12, 1.8291977547804480e-13, -4.2600251434621352e-12, -6.0306263089444042e-12, 2.8173532189431675e-12, 1.5951987215297154e-11, 9.3562705663739326e-12, -2.0223777922285483e-11, -2.5188897705603851e-11, 1.5248534295270297e-11], [-3.4650690638264815e-15, -1.2112911385855618e-14, 2.3480837338145674e-14, 6.1279848150833143e-14, -3.3711516941227927e-14, -1.7993531988507225e-13, -7.3074934033457973e-15, 3.4827244097624723e-13, 3.7517906017542991e-14, -4.9449168582338341e-13, 9.3653518618288256e-14], [4.7764317810950700e-17, 6.2595809874254509e-17, -5.2542508990996481e-16, -1.1038061735902208e-16, 1.8490903370518364e-15, 9.8321429658600734e-17, -4.4160496957905194e-15, 1.4408956225522135e-15, 6.2808461380806229e-15, -6.4171723835476504e-15, -9.7936449059913530e-16], [-6.4163633104711645e-19, 6.4776818276515647e-19, 6.4304684785596561e-18, -1.2492737064250707e-17, -1.3336902821348055e-17, 5.0092933844701285e-17, -1.1979819978589072e-17, -8.7579875696637756e-17, 1.1365689516272218e-16, -3.4714640674664013e-17, -5.3582851546444797e-17], [8.3902324247265223e-21, -2.7248267420958336e-20, -2.6726579860108530e-20, 2.5173635262607902e-19, -3.4485556155267038e-19, -2.8569794323086090e-19, 1.3355150348925996e-18, -1.4955249684040630e-18, 3.5312208947840202e-19, 8.9047876601974956e-19, -1.3851201162640246e-18], [-1.0666730145158044e-22, 5.4315755783992939e-22, -8.6652515624637018e-22, -1.3784484376956623e-21, 8.1348678736873763e-21, -1.3984849522602535e-20, 8.0416917779295862e-21, 1.0834044423675405e-20, -2.9113278402186179e-20, 3.3957569520649256e-20, -2.8549488568446358e-20], [1.3112929566492162e-24, -8.0945856494647931e-24, 2.5916137353237357e-23, -4.1788440525132370e-23, -1.6131360303656955e-24, 1.6610659162194864e-22, -4.2217064266374095e-22, 6.3733997353414283e-22, -7.1342608386391851e-22, 6.4847591813480906e-22, -5.1569120107207197e-22], [-1.5512842289306870e-26, 9.2326843493275569e-26, -3.8668124654968984e-25, 1.1634614231737320e-24, -2.4558745576914919e-24, 3.6737166708387096e-24, -4.0868066139124832e-24, 3.9720291553134665e-24, -4.9433143702556674e-24, 7.1667048575136252e-24, -8.4151029343525036e-24]],
        [[3.7708132985227241e-3, 3.4803791338429172e-2, 1.0182976066445500e-1, 2.1662382260395963e-1, 4.0278140646748867e-1, 7.0799890740412670e-1, 1.2366315885935457e+0, 2.2503769658966747e+0, 4.5640761222362353e+0, 11.876138192541782e+0, 64.503225186048010e+0], [-1.8412487697031260e-4, -1.7118496612609605e-3, -5.0816383756966562e-3, -1.1045037694967454e-2, -2.1121337905534109e-2, -3.8404425113440119e-2, -6.9687931490418339e-2, -1.3199619010662280e-1, -2.7815205821129162e-1, -7.4708227368800571e-1, -4.1392882671200543e+0], [3.3644261430361830e-6, 3.1028123825053358e-5, 9.0542732374193059e-5, 1.9131987427058612e-4, 3.5061135448176777e-4, 5.9948616296360563e-4, 9.9815853171718827e-4, 1.6843022637918850e-3, 3.0714333472412015e-3, 7.0518389932159260e-3, 3.4528378202394537e-2], [-5.4495461955437034e-8, -4.8640623680601683e-7, -1.3237141683862051e-6, -2.4885492371593794e-6, -3.7973072561124274e-6, -4.8761335219916425e-6, -5.0784142208758094e-6, -3.5303480657731981e-6, 4.3121093902075803e-7, 6.2582987055802148e-6, 1.1244713300214923e-5], [8.2392583918098747e-10, 6.8683315416948457e-9, 1.5961869396367167e-8, 2.1883667223653436e-8, 1.5511563179215062e-8, -1.2271303594303821e-8, -6.1809753304869960e-8, -1.0942438646657434e-7, -1.0078842661934045e-7, 7.5395473464114180e-9, 1.5512645741166273e-7], [-1.1898790259851464e-11, -8.8051377169317859e-11, -1.4632980516853162e-10, -4.1961917839876050e-11, 3.0667218690910092e-10, 7.2023818172827827e-10, 6.1546182365452698e-10, -5.9718773142920869e-10, -2.1638556081055601e-9, -1.4726326580856598e-9, 1.8788424271095936e-9], [1.6592257681808675e-13, 1.0099730192469917e-12, 6.3798728128206901e-13, -2.6482206343478490e-12, -6.2333398080141586e-12, -1.9275903328408957e-12, 1.3779815776838434e-11, 1.9205253252774211e-11, -1.5742505147888837e-11, -4.2028573783811843e-11, 1.7049167181617124e-11], [-2.2495996494087157e-15, -9.9065288748048989e-15, 1.0109437783254111e-14, 5.2349395638763438e-14, 1.5797352624668451e-14, -1.5118150499073332e-13, -1.4489779993745582e-13, 3.3387807030676436e-13, 3.0356269108978909e-13, -7.0943924908491543e-13, 1.7791021468149009e-14], [2.9724881077836374e-17, 7.1132177287057628e-17, -3.1951698660772566e-16, -3.9742228409924536e-16, 1.2038236399542402e-15, 1.5729827957674504e-15, -3.8584134411826206e-15, -2.5892013419170186e-15, 1.0221968900239729e-14, -6.5729622242218214e-15, -4.2880773034996812e-15], [-3.8391351322970677e-19, -6.2851225143425451e-20, 4.8992644671811332e-18, -4.0349500111580702e-18, -2.0377180128710241e-17, 2.9213619799238523e-17, 4.2112016294741694e-17, -1.2857486267829457e-16, 9.1577787566341207e-17, 4.1187556762114387e-17, -1.4326727464391702e-16], [4.8365681827487818e-21, -1.0376525588238634e-20, -4.3850353619629034e-20, 1.6535916249069862e-19, -2.4672690183667641e-20, -6.7946822176783206e-19, 1.2078052633717393e-18, -3.2934323674383364e-19, -1.7188793235060094e-18, 3.1879177972455461e-18, -3.3796420754994277e-18], [-5.9604818731177074e-23, 2.5416710133961217e-22, -3.8184094817271400e-23, -2.2010948758822613e-21, 5.8111546071038892e-21, -3.3573928578287390e-21, -1.3729885749057019e-20, 4.1110499224123929e-20, -6.4372707032899826e-20, 7.2550256552227211e-20, -6.7515701884160072e-20], [7.1126240649870410e-25, -4.2653557289575853e-24, 1.0037557440508330e-23, 1.7978302309944505e-24, -7.8171548878927530e-23, 2.3642707897386627e-22, -4.0711270883425656e-22, 4.9806941701041071e-22, -6.1036263090891822e-22, 8.9405422852678961e-22, -1.2032835850687233e-21], [-8.3263766703760859e-27, 5.5695509800460849e-26, -2.2256862415337736e-25, 5.1226102830155799e-25, -5.1651276319186918e-25, -9.0071619763825983e-25, 4.7364556574673326e-24, -1.0382009948551804e-23, 1.1902371203298077e-23, -8.0434962562295121e-25, -1.9601298425458972e-23]],
        [[3.4275552222504221e-3, 3.1611069176537531e-2, 9.2343446339510773e-2, 1.9597388826771017e-1, 3.6320257668792526e-1, 6.3579900462291122e-1, 1.1050368321354405e+0, 1.9997033542840440e+0, 4.0323382654667435e+0, 10.438625898790948e+0, 56.501334734083422e+0], [-1.5961792163861963e-4, -1.4852297150456130e-3, -4.4167097843072603e-3, -9.6280605600094896e-3, -1.8494084305319131e-2, -3.3844856274189743e-2, -6.1962194923891955e-2, -1.1872172224979562e-1, -2.5359071302473745e-1, -6.9036774229179892e-1, -3.8624763011209149e+0], [2.7823709418374822e-6, 2.5796514371933269e-5, 7.6096836245715271e-5, 1.6352053108485538e-4, 3.0670943203004996e-4, 5.4025806780072403e-4, 9.3174390740286439e-4, 1.6311284843925073e-3, 3.0654471192095480e-3, 7.1264934828746168e-3, 3.4679518590741695e-2], [-4.3019725715504048e-8, -3.8937388125892443e-7, -1.0908276675789830e-6, -2.1481065440989165e-6, -3.5079629214269775e-6, -4.9610761933919909e-6, -5.9525370001597161e-6, -5.3486894869149392e-6, -1.5445608804001489e-6, 6.0813510056626519e-6, 1.4049402458061375e-5], [6.2117514985497809e-10, 5.3285410975959351e-9, 1.3205994927969987e-8, 2.0519739079785767e-8, 2.0204465895078907e-8, 1.3607826030748915e-9, -4.6587047975342735e-8, -1.1606821068853114e-7, -1.4695349804474474e-7, -3.3722251151381047e-8, 1.9673117566690889e-7], [-8.5765810618474013e-12, -6.6887878402755960e-11, -1.2862579378685947e-10, -8.9460087048994007e-11, 1.6605945931058111e-10, 6.2964754695854608e-10, 8.8523889954211679e-10, -3.7714952061437589e-11, -2.4002892466195265e-9, -2.7410397316222193e-9, 2.2726310280407917e-9], [1.1441199181508919e-13, 7.6365679848332218e-13, 8.0202530456614144e-13, -1.3742940232151439e-12, -5.3607784449392312e-12, -5.3360056341555712e-12, 8.2801453991449668e-12, 2.6702061303867299e-11, -2.2964153671492659e-12, -6.4399438459892815e-11, 1.4625506782473788e-11], [-1.4867855108364603e-15, -7.7279538378409918e-15, 2.3720284658351863e-15, 3.8399653420979062e-14, 4.2823838118768149e-14, -8.9364288320178740e-14, -2.3626828331197427e-13, 1.7828559436107678e-13, 6.6420938586963088e-13, -8.6447260993392865e-13, -2.3503746535415224e-13], [1.8835503059573107e-17, 6.3613583372935849e-17, -1.7409840227916987e-16, -4.4616330406246224e-16, 5.0369788189899526e-16, 2.1282415705236647e-15, -1.6626489628617600e-15, -6.9726416625451176e-15, 1.1542649246178683e-14, -1.9174337600958850e-15, -1.2780757294817038e-14], [-2.3422472774850268e-19, -3.0534938831693529e-19, 3.2177179698237889e-18, 7.4196243663814399e-19, -1.7394043206181710e-17, 2.1280428555791350e-18, 7.3721524779851355e-17, -1.0100814612102880e-16, -3.9211350506512004e-17, 2.4407020411501764e-16, -3.5919361171088336e-16], [2.8330024295470837e-21, -2.8162562542302083e-21, -3.8349390404099046e-20, 7.7301133367112725e-20, 1.4573256708153953e-19, -6.0895830472113696e-19, 2.9060811389777985e-19, 1.7492076958895969e-18, -4.8499144429351374e-18, 7.1857799395628818e-18, -8.0673049190602371e-18], [-3.4034694207071612e-23, 1.0646031956731818e-22, 2.2471593937421293e-22, -1.6956276948520870e-21, 1.9983793624438985e-21, 5.5973741686344354e-21, -2.4840523335769407e-20, 4.6401835195852881e-20, -6.7249600420602789e-20, 1.0248595591744600e-19, -1.5768116803930579e-19], [3.8642443006463476e-25, -2.1193889672318733e-24, 1.9998460703384259e-24, 1.5391208178500889e-23, -7.1166292519665268e-23, 1.1833328023295897e-22, -2.2905291316461038e-23, -3.6314700950604823e-22, 7.3170667586963307e-22, 1.6709015196335374e-23, -2.7273280899825692e-21], [-4.5501928421455504e-27, 2.9074771691094193e-26, -9.6842086099534335e-26, 6.4313124936708335e-26, 5.8938694475528103e-25, -3.0207641032016246e-24, 8.4900866426708915e-24, -1.9906800813612744e-23, 3.9125241601329633e-23, -4.0073034087736692e-23, -3.8876983919012959e-23]],
        [[3.1290548392583189e-3, 2.8833145574094172e-2, 8.4079761000667402e-2, 1.7794814720264327e-1, 3.2853879928523748e-1, 5.7224369718443922e-1, 9.8833217661515791e-1, 1.7750835110178268e+0, 3.5495911115365052e+0, 9.1151238636167706e+0, 49.054392276329769e+0], [-1.3926707402169399e-4, -1.2961937319836378e-3, -3.8568914376463451e-3, -8.4175699800686534e-3, -1.6203086328071758e-2, -2.9759645061572949e-2, -5.4805232901089884e-2, -1.0596082667900700e-1, -2.2918487989792034e-1, -6.3307781494448040e-1, -3.5843087069836254e+0], [2.3205538526294377e-6, 2.1594456075381005e-5, 6.4193211704091292e-5, 1.3964922887220482e-4, 2.6664163850771448e-4, 4.8124682430479496e-4, 8.5645400294713644e-4, 1.5558930226090820e-3, 3.0312299820092607e-3, 7.1941287318729061e-3, 3.4868550828705835e-2], [-3.4317004526200963e-8, -3.1389304356699694e-7, -8.9905350839874757e-7, -1.8355593745242145e-6, -3.1646789453868367e-6, -4.8462311474287401e-6, -6.5478198973834913e-6, -7.1757896514319618e-6, -4.2758143425987063e-6, 5.0110223913145751e-6, 1.7576547024753739e-5], [4.7405194316518626e-10, 4.1576776822120930e-9, 1.0828508594630734e-8, 1.8479630792259522e-8, 2.2343307713660557e-8, 1.2509917748191789e-8, -2.7451433938448052e-8, -1.1015217129111121e-7, -1.9379911313499760e-7, -1.0595300239729801e-7, 2.4486197629557127e-7], [-6.2692202901510448e-12, -5.0937418718706792e-11, -1.0911277462617809e-10, -1.1111153951467364e-10, 5.3075803748281082e-11, 4.7916888738899706e-10, 1.0010442019317661e-9, 6.3503934656603841e-10, -2.1932609411490427e-9, -4.5737070405178118e-9, 2.4838975863430025e-9], [8.0093111103175359e-14, 5.7401055109662010e-13, 8.0586712630595866e-13, -4.9149495435116634e-13, -4.0214483491960303e-12, -6.9035693553218696e-12, 1.3225320553690588e-12, 2.8140926072435394e-11, 2.0964268511090728e-11, -8.7697706747088613e-11, -1.6052171161650295e-13], [-9.9972591153311700e-16, -5.8823705170387162e-15, -1.6213720210154683e-15, 2.5013863333988262e-14, 5.0165000420330362e-14, -2.4176841456677393e-14, -2.4686146485149445e-13, -8.5974915393307971e-14, 9.6869277303761231e-13, -7.2131671177524221e-13, -9.2937192978921898e-13], [1.2126403916678643e-17, 5.1485319495357988e-17, -8.3342840959681747e-17, -3.7976308679467538e-16, -4.6272114332243038e-18, 1.8369165449966079e-15, 9.4521390521979758e-16, -8.9301232960837991e-15, 6.0770334677460574e-15, 1.3061403038532701e-14, -3.3596421352399456e-14], [-1.4613817920080477e-19, -3.4948065413576531e-19, 1.8951876809728888e-18, 2.5627198361231381e-18, -1.0687987606919988e-17, -1.6180812595066522e-17, 6.4637289119751259e-17, 1.1904838817187904e-18, -2.7426486880839076e-16, 6.1194257246315000e-16, -8.6634131897082052e-16], [1.6723371391220008e-21, 9.1438060845328248e-23, -2.7715664561188040e-20, 1.9130752561745394e-20, 1.7098574792125935e-19, -2.9128618957200256e-19, -6.8395353119038951e-19, 3.0726792255327713e-18, -6.2598283611172693e-18, 1.0659617905755298e-17, -1.8576090772298966e-17], [-2.0059876969078774e-23, 3.4919268109526257e-23, 2.3651721793981252e-22, -9.5995673497620238e-22, -5.4676098841279309e-22, 7.7335046986747326e-21, -1.6682971829861273e-20, 7.4534051165306903e-21, 2.0877256943857555e-20, 2.4194727073549217e-20, -3.3227960778434736e-19], [2.1844544541701343e-25, -9.4236877186082508e-25, -7.9113705066861200e-25, 1.4214683106042282e-23, -3.3448723843548747e-23, -1.9003386486289798e-23, 3.2113338074691147e-22, -1.1333019004030460e-21, 2.9057102115134227e-21, -3.9117963525540298e-21, -4.1073195181969050e-21], [-1.8908458838826018e-27, 1.9874899729383266e-26, -1.2568610893245044e-26, -5.7928422853094560e-26, 7.7015768932471180e-25, -1.8637589430650514e-24, 3.8175275915823105e-24, -5.4600858798244490e-24, 3.4250851135307275e-23, -1.1148063307281065e-22, 1.8316070010677135e-23]],
        [[2.8678662124363500e-3, 2.6402335959113412e-2, 7.6847333770138296e-2, 1.6216388461332346e-1, 2.9814982501210844e-1, 5.1639306964304489e-1, 8.8532025819615982e-1, 1.5753159552212400e+0, 3.1152694440410810e+0, 7.9066862704965354e+0, 42.165440646380807e+0], [-1.2222981220568711e-4, -1.1374468879372777e-3, -3.3837140782574605e-3, -7.3836285071530679e-3, -1.4215731468839303e-2, -2.6138217698276473e-2, -4.8273841559528910e-2, -9.3886884517971868e-2, -2.0519610170276635e-1, -5.7532079988759585e-1, -3.3044463037314334e+0], [1.9504351796687570e-6, 1.8195537261624902e-5, 5.4375442370389591e-5, 1.1932174488896063e-4, 2.3082978727915066e-4, 4.2457973582168646e-4, 7.7590488461941825e-4, 1.4597433146153036e-3, 2.9599823572567639e-3, 7.2406843403461718e-3, 3.5104584482431570e-2], [-2.7639593800706582e-8, -2.5482447675246052e-7, -7.4222468534961312e-7, -1.5580894826901154e-6, -2.8034646942036110e-6, -4.5785259117509200e-6, -6.8274143799667225e-6, -8.8013129280888983e-6, -7.6907003221120723e-6, 2.4638957068647737e-6, 2.1880094261189644e-5], [3.6583004840676170e-10, 3.2642637449582316e-9, 8.8346676739829215e-9, 1.6189450656629855e-8, 2.2552022084601501e-8, 2.0413409007096626e-8, -7.6470224482110801e-9, -9.1056183725888638e-8, -2.3036706728332294e-7, -2.1976939945414947e-7, 2.9162232085123616e-7], [-4.6434835199159711e-12, -3.8963008995220392e-11, -9.0562229088244721e-11, -1.1578728645135497e-10, -2.6910183344073490e-11, 3.1139946713347285e-10, 9.5518852465501740e-10, 1.2501283110763611e-9, -1.3534211179973827e-9, -6.8503090048648307e-9, 2.0115794072772274e-9], [5.6825420274666524e-14, 4.3049740644064904e-13, 7.3197697830664946e-13, 5.3260687586198017e-14, -2.6677202555524068e-12, -6.8574602094832165e-12, -4.8608464013718741e-12, 2.1907441563051604e-11, 4.9004697695260912e-11, -9.8152562182683409e-11, -4.7126215670729979e-11], [-6.8449871473214175e-16, -4.4330691661451777e-15, -3.3909905570456249e-15, 1.4414295352834993e-14, 4.5111121800992105e-14, 2.3673540679433031e-14, -1.8580634279315986e-13, -3.4765961892707552e-13, 9.6131175727020802e-13, 1.2929699282542718e-13, -2.6785180118001833e-12], [7.8830394107615664e-18, 3.9247546214626986e-17, -3.2661976228617394e-17, -2.8214522662390558e-16, -2.7534265476891627e-16, 1.1222297512106740e-15, 2.6478045608440879e-15, -6.7427802705834178e-15, -7.6737923931918690e-15, 4.2357459263019410e-14, -8.2124210749219793e-14], [-9.4044730832119371e-20, -3.2445814122999821e-19, 9.8446984108534608e-19, 2.6759763509030964e-18, -4.6607194956791955e-18, -2.1555164626499193e-17, 2.7600023018223976e-17, 1.1466009651663799e-16, -4.6089843296151005e-16, 9.8218775051580968e-16, -1.9459366923081270e-15], [1.0001735920465068e-21, 1.0335766681966908e-21, -1.7970006468804914e-20, -8.7972835509299542e-21, 1.2559551757145382e-19, 5.2511003196003256e-21, -1.0382812927750231e-18, 2.2299703118163618e-18, -1.9020548608116087e-18, 5.3859845449674855e-18, -3.5824004926961889e-17], [-1.0607688547651300e-23, 1.8166280284959261e-23, 2.1966177866463779e-22, -3.1318914347755347e-22, -1.2048149326766022e-21, 5.4497982009613882e-21, 8.8691200991177405e-22, -4.2366967045100630e-20, 1.7836905984425458e-19, -3.1368124057921019e-19, -3.7043306167986149e-19], [2.0444688678673698e-25, 3.6112922479507229e-25, 8.6958323854163744e-25, 1.3875490497125992e-23, 5.7117212391484487e-24, -5.6400630303232275e-23, 3.6287721366713073e-22, -7.1327637789832461e-22, 2.9993908230377582e-21, -9.9803195702636699e-21, 6.6841301057609357e-21], [1.4221982351477481e-27, 3.2781276914680753e-26, 7.6476881143952453e-26, 6.8439092859844290e-26, 7.3128115888802493e-25, 3.8041656401808469e-25, -1.6824149220063550e-24, 2.0383394961112129e-23, -4.0744717143318514e-23, -8.5191510732407263e-23, 5.0711315463535830e-22]],
        [[2.6380256361563527e-3, 2.4263913024213199e-2, 7.0488313931141143e-2, 1.4829498717089985e-1, 2.7146275875665919e-1, 4.6734348379386781e-1, 7.9471983042206559e-1, 1.3988695585815594e+0, 2.7282195538563572e+0, 6.8140142012526914e+0, 35.838273822033403e+0], [-1.0786013256821887e-4, -1.0032820612146538e-3, -2.9820659154461025e-3, -6.4996142474770122e-3, -1.2497586776855665e-2, -2.2955379993633718e-2, -4.2394995707423999e-2, -8.2654100535909423e-2, -1.8194965561609768e-1, -5.1734806068118340e-1, -3.0224775552192069e+0], [1.6510384172630130e-6, 1.5427006233392582e-5, 4.6260102545143858e-5, 1.0210299691465728e-4, 1.9932530252420655e-4, 3.7177444158125578e-4, 6.9384729166394836e-4, 1.3462938055948541e-3, 2.8449158240083901e-3, 7.2442283535439813e-3, 3.5396185387720638e-2], [-2.2461211139737041e-8, -2.0830875423704746e-7, -6.1443949378651619e-7, -1.3173948048982407e-6, -2.4500067966396762e-6, -4.2107402828578243e-6, -6.8048627443166387e-6, -1.0033318299609275e-5, -1.1520764396075222e-5, -2.2720419171656219e-6, 2.6774678123753381e-5], [2.8518102140857997e-10, 2.5789575908636212e-9, 7.1909188861795547e-9, 1.3914273777280149e-8, 2.1470192536578186e-8, 2.5067269374473228e-8, 9.9210925100248317e-9, -6.1692222905972362e-8, -2.4370313975018402e-7, -3.7910594278738574e-7, 3.1262125067766335e-7], [-3.4840313989027205e-12, -2.9989122716914610e-11, -7.4223981622907593e-11, -1.1059991966559200e-10, -7.6896539938929592e-11, 1.5812794966453712e-10, 7.8631058119160446e-10, 1.6390419430307378e-9, 1.0250878538461494e-10, -8.9760349747981480e-9, -3.9162733473709537e-10], [4.0732757535108495e-14, 3.2226697312957337e-13, 6.2685144578912077e-13, 3.4436245835753439e-13, -1.5468269514006121e-12, -5.8057080682430311e-12, -8.7831018283655314e-12, 9.8721276863955208e-12, 6.9984124990062213e-11, -7.0143776155828843e-11, -1.7155587746035631e-10], [-4.7941614216247607e-16, -3.3539245209341965e-15, -3.9875553273181277e-15, 6.8445464410839033e-15, 3.4491710983634852e-14, 4.7635671050319781e-14, -9.2827681408987439e-14, -4.8424822570863704e-13, 4.5305819672058480e-13, 2.0562128417187299e-12, -6.7252496723692953e-12], [5.1339124552160108e-18, 2.8597862803127510e-17, -7.5996752693153905e-18, -1.9355638730629416e-16, -3.6377701795495651e-16, 4.0143839702529429e-16, 2.9469017282975028e-15, -1.5195573356634673e-15, -2.3436394087755557e-14, 7.6918605643088234e-14, -1.8012968935606065e-13], [-6.0127885769422228e-20, -2.5553017548439198e-19, 4.8760859017303277e-19, 2.2618512361351727e-18, -4.8679607260981082e-19, -1.7219650542560926e-17, -8.4515527004592760e-18, 1.6074467771005325e-16, -3.4878557046335573e-16, 7.7329656847824978e-16, -3.4809364435095074e-15], [7.8596737216152170e-22, 2.8607004482690519e-21, -5.7405873817538416e-21, -6.1473906685754951e-21, 9.1220346134614904e-20, 1.9894501329108513e-19, -6.6079057517587678e-19, 3.8668606166649978e-20, 7.9301559823470438e-18, -1.9420095818098045e-17, -3.1336780428829767e-17], [1.8017639334412914e-24, 7.9365944440076165e-23, 3.7489233298434914e-22, 4.7755714978751715e-22, -1.0642523058347628e-22, 3.7446580228266947e-21, 1.4999661800458316e-20, -4.7270390831723386e-20, 2.3316219674090667e-19, -7.9238825804592211e-19, 9.8814696532279373e-19], [3.1424577553974473e-25, 2.1188848710266352e-24, 5.5219780469902416e-24, 1.8952936464818199e-23, 3.6479092215577022e-23, -1.0145746107438111e-23, 2.0378428833786050e-22, 5.0479505486015248e-22, -1.3871751075554191e-21, -6.9819000234253008e-21, 5.8684671465943717e-20], [1.3959377951700393e-27, 2.2596110638947844e-26, 6.1708137186046006e-26, 4.0528461519427187e-26, 2.9227217652347965e-25, 8.5664930052846379e-25, -4.2800164553186840e-24, 1.9741113878412044e-23, -1.1594272245666446e-22, 2.5733506418306207e-22, 1.4855092609483066e-21]],
        [[2.4347116203863169e-3, 2.2373315957013517e-2, 6.4872223733034849e-2, 1.3606508437437623e-1, 2.4797312527431693e-1, 4.2425185301101218e-1, 7.1522467620101008e-1, 1.2439402778959629e+0, 2.3865954744284298e+0, 5.8371034844022423e+0, 30.077564122696398e+0], [-9.5657366151746371e-5, -8.8920635962080887e-4, -2.6396299603988280e-3, -5.7424054590830495e-3, -1.1014873243849043e-2, -2.0176288194911701e-2, -3.7167035093057100e-2, -7.2379577726487167e-2, -1.5980884946940064e-1, -4.5962052805897343e-1, -2.7379402740895039e+0], [1.4067421380392399e-6, 1.3156366563368054e-5, 3.9530712345947738e-5, 8.7558637994417986e-5, 1.7192991421249191e-4, 3.2373314434778679e-4, 6.1362126469069300e-4, 1.2210823141676354e-3, 2.6836422593771571e-3, 7.1744153283427495e-3, 3.5746303528834393e-2], [-1.8406897776318420e-8, -1.7145362471853389e-7, -5.1048147122005901e-7, -1.1119598379704565e-6, -2.1204994876789777e-6, -3.7914612705461722e-6, -6.5324658612832408e-6, -1.0749914953317934e-5, -1.5309688865024658e-5, -9.8405280288996932e-6, 3.1412961948075514e-5], [2.2427721146065290e-10, 2.0494143975165037e-9, 5.8477636967792181e-9, 1.1797145854942730e-8, 1.9632476158490446e-8, 2.6949792974120008e-8, 2.3382151881826335e-8, -2.7646313521810022e-8, -2.2430697594506589e-7, -5.6927623402966953e-7, 2.4448321521047792e-7], [-2.6507391728265689e-12, -2.3285730813295918e-11, -6.0531321628654851e-11, -1.0066049977722392e-10, -1.0373724671256875e-10, 3.5738149103233946e-11, 5.5455315028431582e-10, 1.7130375474069678e-9, 1.8406584681202566e-9, -9.6718602913067291e-9, -7.5412486464670329e-9], [2.9329163423630417e-14, 2.3999222708067152e-13, 5.1432907883207779e-13, 4.6151532695591895e-13, -7.4154234625746148e-13, -4.3724636978171186e-12, -1.0136004014992998e-11, -3.5164388733473222e-12, 7.0825748365631338e-11, 2.4592430466883831e-11, -4.6033773949334676e-10], [-3.4327412135923415e-16, -2.5551879665477629e-15, -3.9570573219356952e-15, 1.9629861388542091e-15, 2.3297119930184538e-14, 5.2416992941553039e-14, -7.0690565578686604e-15, -4.4350767254552542e-13, -4.1857765750830193e-13, 4.7415079660735385e-12, -1.4589932403252923e-11], [3.5948080099637782e-18, 2.2584745625958703e-17, 1.0535521118094189e-17, -1.0911770194019922e-16, -3.1196782993961297e-16, -3.6135753056433386e-17, 2.3455456711879250e-15, 3.8795327938169339e-15, -2.8147811422691429e-14, 8.1938889199355920e-14, -3.0786509541980255e-13], [-2.2714452844324911e-20, -4.0281533899336073e-20, 6.6803160061835750e-19, 2.6914181750652038e-18, 3.5868438710821913e-18, -6.0318639733219254e-18, -1.9724103897050931e-17, 1.3046697683658316e-16, 1.3252980689443037e-16, -7.3354761039268257e-16, -2.7488820066950943e-15], [1.1822402644709147e-21, 8.5961756299991609e-21, 1.6506141386010770e-20, 3.3008326287032281e-20, 1.2388777331794245e-19, 3.5817461489599941e-19, 1.1973674661013598e-19, -1.2746506817279158e-18, 1.4620960933585943e-17, -5.4726004021741978e-17, 1.0232148238658942e-16], [1.4630141433181509e-23, 1.6923003907269052e-22, 5.9802760060276497e-22, 1.1811957140142238e-21, 1.3831791729846227e-21, 3.2900142992019876e-21, 1.7911501747899898e-20, -1.0532820239174592e-20, 2.7332798940511679e-20, -6.1208583880742263e-19, 5.6724528520409169e-18], [1.0109167451340922e-25, 4.6542313048095624e-25, 3.1357544978978435e-25, 2.8861705713578711e-24, 8.8566931822933471e-24, -3.8919471967368163e-23, -1.2204438620603920e-22, 7.2860550317436227e-22, -6.7390088906239757e-21, 1.7823998307636897e-20, 1.2843362279917259e-19], [-1.2363870673461082e-26, -1.1133279884875601e-25, -3.3744893049291226e-25, -8.2070806517289679e-25, -1.6325277527906309e-24, -2.5841014185580367e-24, -8.8261609971232580e-24, -1.3839852804177313e-23, -6.4254367871821513e-23, 6.2231551805992069e-22, 4.5331061946697619e-22]],
        [[2.2539919154163632e-3, 2.0694010298335622e-2, 5.9890875966113034e-2, 1.2524065478107626e-1, 2.2724190127959333e-1, 3.8635025458734248e-1, 6.4555633352836546e-1, 1.1085376617328459e+0, 2.0878242844131875e+0, 4.9747650984229013e+0, 24.888884152883750e+0], [-8.5229752683831812e-5, -7.9166123626219658e-4, -2.3463846138259823e-3, -5.0922506294184220e-3, -9.7360408099134249e-3, -1.7761063096876696e-2, -3.2564506084776985e-2, -6.3131880657018693e-2, -1.3913221702449169e-1, -4.0286664260523404e-1, -2.4504116607736087e+0], [1.2057559951036566e-6, 1.1281249080054540e-5, 3.3928441309005534e-5, 7.5283196144219479e-5, 1.4829760041789936e-4, 2.8082926137572513e-4, 5.3779971784218327e-4, 1.0905342251218749e-3, 2.4798914323790057e-3, 6.9955340956990369e-3, 3.6139378251876426e-2], [-1.5207375761767879e-8, -1.4209860858475742e-7, -4.2596822501348724e-7, -9.3869652377272333e-7, -1.8237414198592703e-6, -3.3597530622724908e-6, -6.0827627760875050e-6, -1.0926673193030053e-5, -1.8517458583555517e-5, -2.0414376009620914e-5, 3.3358103897539838e-5], [1.7758814405376999e-10, 1.6359289112692357e-9, 4.7519134133968231e-9, 9.8975334432667176e-9, 1.7427409040152906e-8, 2.6732899597650776e-8, 3.2065825677981458e-8, 4.8542079167834271e-9, -1.7193771623944247e-7, -7.4468800973107491e-7, -5.5906568776951810e-8], [-2.0495786987134204e-12, -1.8301408561236144e-11, -4.9450887504115669e-11, -8.9218046202160479e-11, -1.1467812901840579e-10, -5.1815269183590015e-11, 3.1680750767232302e-10, 1.4976278144228178e-9, 3.3064436135503126e-9, -7.2326689719118056e-9, -2.4653928751032508e-8], [2.1277314781461968e-14, 1.7890180589269643e-13, 4.1306096240088207e-13, 4.8454519555862948e-13, -2.0209228726569226e-13, -2.9325348015319802e-12, -9.3751804998987543e-12, -1.3563513968329400e-11, 4.8001460369908159e-11, 1.8686990214783617e-10, -1.0126690912079868e-9], [-2.3097134119067397e-16, -1.7754407865498273e-15, -3.0592400051374379e-15, 3.7266900992477984e-16, 1.6447728508358214e-14, 5.0776441691377843e-14, 5.8916790166568560e-14, -2.5448741543087008e-13, -1.1337747330687611e-12, 6.4854981719533595e-12, -2.4640287731347728e-11], [3.7743458682519713e-18, 2.8976997054624423e-17, 5.2244377190403264e-17, 2.3005453363091235e-17, -8.0681949551746700e-17, 2.9805935096204615e-17, 1.8825971410272217e-15, 7.6139957448154892e-15, -1.3482019968139582e-14, 1.2741885545126165e-14, -2.5702293599532201e-13], [3.5741972217730937e-20, 4.3046468381818608e-19, 1.7728643867554966e-18, 4.8898043132027097e-18, 9.4827425271752231e-18, 9.9770187049749081e-18, -2.7361625971064324e-18, 7.6717142855950578e-17, 6.3956737854212774e-16, -3.1012524608249115e-15, 8.0406291048816462e-15], [1.6021385986642381e-21, 1.3513651568489942e-20, 3.4070492424283472e-20, 6.6845722228327279e-20, 1.5204765154452855e-19, 3.9203315362469816e-19, 5.9274253435776964e-19, -1.3678839976331762e-18, 8.1829166896988047e-18, -5.2495935814328399e-17, 4.7089790181527699e-16], [-5.2431225138765205e-24, -3.4844671168440257e-23, -6.6040901163875538e-23, -2.4949190816926664e-22, -1.2978169045191159e-21, -3.7699175176027164e-21, -1.0163934093484439e-21, -5.1652864580179054e-21, -3.1617893549879604e-19, 8.9418322348754546e-19, 9.9893435744005448e-18], [-1.1094725311817558e-24, -1.0652997502734666e-23, -3.2891745220585000e-23, -7.2635741987574349e-23, -1.3960500605010856e-22, -2.8895146744450712e-22, -6.9272381870314157e-22, -6.7234096918299819e-22, -6.2444977087110996e-21, 3.9333216068163648e-20, -1.5348143333082894e-20], [-3.2448813423110616e-26, -2.9894938400470882e-25, -8.8337183691160866e-25, -1.9445271148389911e-24, -3.7394665932198630e-24, -6.2942200758681699e-24, -1.1512701413556165e-23, -3.2370218457479546e-23, 8.6719211549015713e-23, -2.6740805162071218e-23, -7.2294609837904829e-21]],
        [[2.0926327284884073e-3, 1.9195834740116056e-2, 5.5454212419812522e-2, 1.1562456215784196e-1, 2.0889012883594692e-1, 3.5295215849615059e-1, 5.8450500016361995e-1, 9.9058531481801956e-1, 1.8286658413426431e+0, 4.2240712955698347e+0, 20.278401883469834e+0], [-7.6268299736296873e-5, -7.0781338216805850e-4, -2.0941828314952347e-3, -4.5324818392180934e-3, -8.6326345910776949e-3, -1.5668526982270011e-2, -2.8544953647122899e-2, -5.4928615255113890e-2, -1.2022331432392561e-1, -3.4809392060078930e-1, -2.1597579219004201e+0], [1.0390477258755844e-6, 9.7217505300419187e-6, 2.9242043910574565e-5, 6.4912182062623650e-5, 1.2800961822345851e-4, 2.4303333458837541e-4, 4.6805620388477456e-4, 9.6080592904576063e-4, 2.2435299446248851e-3, 6.6752548732547003e-3, 3.6513088523913593e-2], [-1.2668086390367527e-8, -1.1863348237526178e-7, -3.5733600358417662e-7, -7.9397173346678971e-7, -1.5633591577438132e-6, -2.9436505913692501e-6, -5.5305618925035413e-6, -1.0628970823794726e-5, -2.0688219075862491e-5, -3.3181806289687379e-5, 2.6952016432456745e-5], [1.4125637708378721e-10, 1.3094255292469978e-9, 3.8563505662055062e-9, 8.2314903320835878e-9, 1.5122615003333654e-8, 2.5110265385654965e-8, 3.6320905708680449e-8, 3.1126012804321357e-8, -9.7015766943788453e-8, -8.3002803861312165e-7, -8.5103942480913047e-7], [-1.6012824858090105e-12, -1.4481757674548152e-11, -4.0308789785578111e-11, -7.7201333187302183e-11, -1.1394160710595780e-10, -1.0460058643935481e-10, 1.1846511448840955e-10, 1.1162774453653796e-9, 4.0515525648345627e-9, -6.3774075841894901e-10, -5.7748977792388296e-8], [1.6774339597776749e-14, 1.4517306972006407e-13, 3.6207893106267356e-13, 5.3493934423783896e-13, 2.8063982964450749e-13, -1.4251489097675175e-12, -6.8680221037089770e-12, -1.6944536413347038e-11, 1.3947399298543910e-11, 3.5510108020300815e-10, -1.7436768914110122e-9], [-7.8876337958853080e-17, -5.1021551525368361e-16, -1.4349784198147638e-16, 4.3437659297836380e-15, 2.0243999324331941e-14, 5.9888323030482206e-14, 1.2140717303383619e-13, 2.1551121816037467e-14, -1.1653205459527009e-12, 4.8100693536189873e-12, -2.3818722711323253e-11], [5.9712931158672421e-18, 5.2050005995477929e-17, 1.3445180935624814e-16, 2.3253514791953178e-16, 3.3344293304116288e-16, 5.8583939664374615e-16, 2.0969924722927064e-15, 9.2099420915475983e-15, 1.1426995808882350e-14, -1.2252535281346465e-13, 4.6303809462840004e-13], [7.3453489536074962e-20, 7.3390964799564212e-19, 2.4488138868499007e-18, 5.9618901955977515e-18, 1.1777914287698557e-17, 1.7155992057685238e-17, 8.4546939931831071e-18, 2.7251797281587841e-18, 6.2134951592513047e-16, -3.9169018555731437e-15, 3.3704393435068756e-14], [-3.9614252781155835e-22, -4.7420384606625936e-21, -1.9586996242915573e-20, -5.5457899188850409e-20, -1.1751490610518359e-19, -1.8462693014632614e-19, -3.5486594370055959e-19, -2.7953582623988615e-18, -1.0151735533723965e-17, 2.1311322333689573e-17, 7.1242494201387058e-16], [-9.7802700267991245e-23, -9.0649634291147691e-22, -2.6949851164141733e-21, -5.9896338049561839e-21, -1.2188657838425930e-20, -2.4315001176772461e-20, -4.4523065240855766e-20, -6.7115293551796440e-20, -4.5773813659522302e-19, 2.1555146557653682e-18, -4.0588004130092130e-18], [-2.5854396691386622e-24, -2.4117574833934031e-23, -7.1711038192050940e-23, -1.5444650422637362e-22, -2.8755609195925109e-22, -5.1118314318554913e-22, -9.8010801742036734e-22, -1.5482587260836805e-21, 1.1264186598646602e-21, 1.4851989888817310e-21, -6.3894323989762981e-19], [-1.2740116385483543e-26, -1.1071250765821941e-25, -2.8607474438404459e-25, -4.9209658844635486e-25, -5.6748827872076078e-25, 3.1255559350735237e-25, 4.8463257250693845e-24, 9.0745543635156293e-24, 1.7647996286742178e-22, -1.3260971471703435e-21, -1.4573183444432874e-20]],
        [[1.9479527285116525e-3, 1.7853711575377855e-2, 5.1486906320864085e-2, 1.0705023112129610e-1, 1.9259232046664173e-1, 3.2345222307334661e-1, 5.3095644064884017e-1, 8.8801763719288948e-1, 1.6053667756738058e+0, 3.5798665912467664e+0, 16.251783774965797e+0], [-6.8527858228696878e-5, -6.3539841306683837e-4, -1.8764078507957081e-3, -4.0491685997835993e-3, -7.6796552865118080e-3, -1.3858893600566584e-2, -2.5055963519940871e-2, -4.7742335529860424e-2, -1.0328827229264834e-1, -2.9650814744668510e-1, -1.8666944984948608e+0], [8.9960425569126286e-7, 8.4149043459146393e-6, 2.5299166535577810e-5, 5.6126205462896911e-5, 1.1062765200397697e-4, 2.1004672038505057e-4, 4.0522893534483516e-4, 8.3691353355056366e-4, 1.9886627257548510e-3, 6.1985720179292577e-3, 3.6708821230083075e-2], [-1.0642649955414838e-8, -9.9811638576977893e-8, -3.0160333203976281e-7, -6.7386378778244730e-7, -1.3390431416013313e-6, -2.5598662381212330e-6, -4.9381348735409083e-6, -9.9736492715182702e-6, -2.1584156299983074e-5, -4.6064995924224919e-5, 1.6413088149687167e-6], [1.1319844864688432e-10, 1.0545389526233868e-9, 3.1395650917478351e-9, 6.8307840599233747e-9, 1.2964728965426670e-8, 2.2825039367511567e-8, 3.7356911777424803e-8, 4.9602915103793842e-8, -1.4992275254060491e-8, -7.4945611862235975e-7, -2.4644562996189126e-6], [-1.2015237932907083e-12, -1.0960031110613216e-11, -3.1111748633838289e-11, -6.1894595287651162e-11, -9.8869596657287464e-11, -1.1610310160964280e-10, 2.0822128448852870e-12, 7.4930682690007381e-10, 4.0529908467618439e-9, 8.9378735970236922e-9, -1.0462831443807271e-7], [1.7557071610835061e-14, 1.5736360947460273e-13, 4.2882852301531274e-13, 7.8633032168755455e-13, 1.0468788532849201e-12, 5.8270728349610808e-13, -2.5289053705990678e-12, -1.2393421728883993e-11, -1.0975957787469103e-11, 4.1590254242533995e-10, -1.9866583792667384e-9], [1.4083959689851397e-16, 1.4430420890619100e-15, 5.1258833979502725e-15, 1.4146279530296593e-14, 3.5505102736325409e-14, 8.4589079538119165e-14, 1.8605613636231522e-13, 2.8932894126269625e-13, -5.5721725344026074e-13, -1.0259226267907500e-12, 1.4921813501812302e-11], [6.9610446666578541e-18, 6.2356381699789537e-17, 1.7081425428368840e-16, 3.2429896480935318e-16, 5.0804321688646734e-16, 7.5154078626212596e-16, 1.5623795921462844e-15, 6.4149843543437897e-15, 2.2021511294819245e-14, -2.2699589623328856e-13, 2.0464293879399515e-12], [-6.4395818556890470e-20, -5.8712244764845858e-19, -1.6891543324702290e-18, -3.6147516263392015e-18, -7.4486654563757518e-18, -1.8098720396240480e-17, -5.6535182353253566e-17, -1.8539394183461567e-16, -1.3839277111007525e-16, -1.3969287484228390e-15, 4.7295899662005391e-14], [-7.2836927791928802e-21, -6.8575534244067989e-20, -2.0845002956892730e-19, -4.6732173707288609e-19, -9.2090434656912986e-19, -1.7005422370841217e-18, -3.0914456007912916e-18, -6.8483712319732044e-18, -2.5806023380227525e-17, 9.3334870086556261e-17, -3.5266394191831251e-16], [-2.0105049347511458e-22, -1.8588660166498183e-21, -5.4623965861698623e-21, -1.1728029117043454e-20, -2.2202550557986007e-20, -4.0085506463008832e-20, -6.9661623893243159e-20, -9.5981442949507142e-20, -1.7881374891002820e-19, 6.4003906925338551e-19, -4.6846802413368622e-17], [-6.8190646312253125e-25, -5.9288667263144691e-24, -1.4871763782796389e-23, -2.1735377405513051e-23, -8.2899598434588828e-24, 7.5157857251824457e-23, 3.3326535194517360e-22, 1.1480429005736935e-21, 1.0579312215515450e-20, -5.5432248182970598e-20, -9.0493570646971080e-19], [1.0858384046119038e-25, 1.0189231233717108e-24, 3.0801047138562817e-24, 6.8755861646752012e-24, 1.3634569446616704e-23, 2.6146396328793300e-23, 5.1616046016548578e-23, 1.0249377322068482e-22, 1.9200239557822905e-22, -2.4968106867495192e-22, 1.3406060594139651e-20]],
        [[1.8177100543178346e-3, 1.6646633521462349e-2, 4.7925597107640361e-2, 9.9376550882429896e-2, 1.7806954430852388e-1, 2.9732180643050462e-1, 4.8390586262694002e-1, 7.9885949331292743e-1, 1.4138804461272285e+0, 3.0345556160890183e+0, 12.811539893006948e+0], [-6.1812750645047186e-5, -5.7259854526524827e-4, -1.6876808906523836e-3, -3.6307331181076857e-3, -6.8555213549817702e-3, -1.2295352392383547e-2, -2.2041010596956892e-2, -4.1511221449902863e-2, -8.8413041272600949e-2, -2.4931754382132841e-1, -1.5737900332811560e+0], [7.8204531022278896e-7, 7.3118778276301776e-6, 2.1962759619043942e-5, 4.8658478779988241e-5, 9.5743906835006018e-5, 1.8144765328280948e-4, 3.4955328536183453e-4, 7.2244213295370419e-4, 1.7308308843308507e-3, 5.5814370346245773e-3, 3.6415231829261489e-2], [-8.9990810648769731e-9, -8.4470090918194375e-8, -2.5573044294496195e-7, -5.7329623451292705e-7, -1.1456964579659348e-6, -2.2116410419654540e-6, -4.3415494927712597e-6, -9.0732017790284946e-6, -2.1193869574910713e-5, -5.6108768414865753e-5, -5.6827616718652522e-5], [9.3813398613118818e-11, 8.7737925939295307e-10, 2.6345816022044546e-9, 5.8186966374065189e-9, 1.1326482726286144e-8, 2.0844193091410978e-8, 3.7231258492855548e-8, 6.2357085905594769e-8, 6.2534918820071399e-8, -4.7755238740858092e-7, -4.9557694973034455e-6], [-7.1223748918598365e-13, -6.5153339222399155e-12, -1.8605079250135894e-11, -3.7370483226084244e-11, -6.0525277896121633e-11, -7.2130833162683343e-11, 6.6824533941498602e-12, 5.6404502811383510e-10, 3.6700529099629260e-9, 1.7733814828502763e-8, -1.3853027071458170e-7], [2.3771159909580828e-14, 2.1784331351055237e-13, 6.2560490181941230e-13, 1.2767710273688293e-12, 2.1670735057861163e-12, 3.0777106626784529e-12, 2.8731477436613224e-12, -2.8377614611383500e-12, -1.8920258863800438e-11, 2.8315393317890550e-10, -4.4190846441630398e-10], [2.5346401573667093e-16, 2.4159039185640730e-15, 7.5572300514997078e-15, 1.7873058021601090e-14, 3.8575683977278201e-14, 8.1945541060007600e-14, 1.7438226924246446e-13, 3.2858512037522070e-13, -1.3634560483277089e-13, -8.3639278924991732e-12, 1.0029994414774572e-10], [-2.6208749160741096e-18, -2.6755721184440408e-17, -9.4291401672473698e-17, -2.5702958768719687e-16, -6.3533174288919724e-16, -1.4940647657629527e-15, -3.3069847324657195e-15, -5.8900566720025718e-15, -1.7911696743709087e-15, -2.1001367138036851e-13, 2.9143567103742740e-12], [-5.1363976067560039e-19, -4.7817914043545913e-18, -1.4240413920902228e-17, -3.1161163644681490e-17, -6.0476087570430691e-17, -1.1384271983902867e-16, -2.2442138452064395e-16, -5.0365233660235152e-16, -1.1390081500872092e-15, 2.1928494730827117e-15, -1.6056874266351992e-14], [-1.3786212099465532e-20, -1.2800939058408709e-19, -3.7877549638946997e-19, -8.1750202184914293e-19, -1.5390758060342003e-18, -2.6994909804122544e-18, -4.5081934244320820e-18, -7.3662888800944693e-18, -1.8461249266234515e-17, 7.3547267420640588e-17, -2.8427055281792882e-15], [1.0966876808362680e-24, 4.7948163479228846e-23, 3.7356790483154830e-22, 1.6057922692842263e-21, 5.2509740062906263e-21, 1.5106616777735530e-20, 4.2837002552997688e-20, 1.4291495248337788e-19, 6.1936698094687873e-19, -9.5643887109766994e-19, -4.8283340904886821e-17], [1.1404103638606641e-23, 1.0662676509793026e-22, 3.2031208033171957e-22, 7.0991289751358470e-22, 1.3978937662618567e-21, 2.6492350927171400e-21, 5.0608120928494264e-21, 9.9960458054147299e-21, 2.4077080819941835e-20, 1.6715524263467640e-20, 1.3345205119071637e-18], [3.6710882963556528e-25, 3.4070694258346724e-24, 1.0075253651902382e-23, 2.1754819558688713e-23, 4.1160615036784422e-23, 7.3601298100192383e-23, 1.3021309576178289e-22, 2.3392731467468541e-22, 3.3916688258444908e-22, 2.7869169253000793e-21, 6.6626382515988611e-20]],
        [[1.7000163821661708e-3, 1.5556884741645421e-2, 4.4716710370944771e-2, 9.2483654220848026e-2, 1.6508304294211807e-1, 2.7410258876096099e-1, 4.4246246355512389e-1, 7.2128433647753004e-1, 1.2501112214893416e+0, 2.5783672098739508e+0, 9.9520328781844016e+0], [-5.5963697605959169e-5, -5.1792739858174318e-4, -1.5235599402071145e-3, -3.2674460837700716e-3, -6.1415548122489177e-3, -1.0944340591295857e-2, -1.9442810286780455e-2, -3.6149390460709679e-2, -7.5561280973251214e-2, -2.0746025538007604e-1, -1.2867527220166063e+0], [6.8269838865223674e-7, 6.3791387271591086e-6, 1.9137443924378996e-5, 4.2318638832697740e-5, 8.3052938481587538e-5, 1.5687617525641727e-4, 3.0104922614674937e-4, 6.1991739774635484e-4, 1.4848451549991205e-3, 4.8749391086201452e-3, 3.5167283672653232e-2], [-7.5790393440033660e-9, -7.1171519538817321e-8, -2.1567939725468458e-7, -4.8437340092654058e-7, -9.7103467946265741e-7, -1.8850338619143530e-6, -3.7396950876738780e-6, -7.9864276133061549e-6, -1.9632711041035429e-5, -6.0635129952768150e-5, -1.5773174748386200e-4], [8.5713883189467765e-11, 8.0353681318376885e-10, 2.4256322484259933e-9, 5.4082744070807987e-9, 1.0701719960004525e-8, 2.0279621841850896e-8, 3.8352514396116770e-8, 7.3515088173826798e-8, 1.3087851927673376e-7, -7.7434787984780211e-8, -7.5558645260597352e-6], [-8.6710744743396073e-14, -7.6433143791841083e-13, -1.9635681485536081e-12, -2.8972238498463813e-12, -2.5019181138532880e-13, 1.9415354002296789e-11, 1.1374784411268223e-10, 5.6674465972195173e-10, 3.1224262755804884e-9, 2.1051592881151935e-8, -1.0629051514020899e-7], [2.6215958677489072e-14, 2.4116147068035856e-13, 6.9891064617635693e-13, 1.4529215371271756e-12, 2.5603812693230328e-12, 3.9591660014747416e-12, 4.8583329747264261e-12, 7.1306581011808439e-13, -3.0301359563444403e-11, -2.9523021633729516e-11, 3.4123751459011654e-9], [-2.2000778323053189e-16, -2.0612410431779891e-15, -6.2032249002694984e-15, -1.3700296821454621e-14, -2.6511594318563732e-14, -4.8161764619913809e-14, -8.6541819255776436e-14, -1.8435520583526881e-13, -9.1614864170550573e-13, -1.3300741689892450e-11, 1.5983164749680459e-10], [-2.9029013364006656e-17, -2.7192791234858177e-16, -8.2001304648509234e-16, -1.8279662455697989e-15, -3.6266829211607164e-15, -6.9318044672906986e-15, -1.3347473182671288e-14, -2.6210795608417196e-14, -4.5994616234206198e-14, -8.2394179927785857e-14, 3.6972979133308885e-14], [-8.3105408824722680e-19, -7.6870474877510331e-18, -2.2574183381173110e-17, -4.8206771190370661e-17, -8.9776847787691654e-17, -1.5719285607789535e-16, -2.7151305359336636e-16, -4.8967051744128542e-16, -9.3670600772693957e-16, 5.0211770454870904e-15, -1.4172982662525792e-13], [5.3568847866300078e-21, 5.1982679722681152e-20, 1.6795210386095109e-19, 4.1394232204889032e-19, 9.3595871565609042e-19, 2.1089077799672195e-18, 5.0283303818529344e-18, 1.3416704655527251e-17, 3.9212976243445847e-17, 9.5293528730755316e-17, -2.4492224372566731e-15], [1.0090421992753139e-21, 9.4241468656458906e-21, 2.8240703623231657e-20, 6.2305892760812769e-20, 1.2172852867327117e-19, 2.2789250942130016e-19, 4.2985562980493883e-19, 8.6048147953086147e-19, 2.0368044091547882e-18, 2.5912032915032264e-18, 8.4269798184426493e-17], [2.7486271713723265e-23, 2.5473210088895817e-22, 7.5114958530934077e-22, 1.6150580549696506e-21, 3.0382335582224877e-21, 5.3870436641265602e-21, 9.3636339595514731e-21, 1.6121827089560537e-20, 2.5558023723928835e-20, 8.4352945019622154e-20, 3.4261066464193606e-18], [-4.4717148286653799e-26, -4.7106715556517594e-25, -1.7430460950151518e-24, -5.0107343956939849e-24, -1.3113948464872067e-23, -3.3396419660866633e-23, -8.6769530619577045e-23, -2.4234627851969690e-22, -8.3828929502236479e-22, -2.7909258199539933e-21, -2.1003918592895282e-20]],
        [[1.5932790690741072e-3, 1.4569513228359138e-2, 4.1814961382632257e-2, 8.6269947493306278e-2, 1.5342952424597531e-1, 2.5340121736508859e-1, 4.0585062717002903e-1, 6.5365608730274881e-1, 1.1101494392294154e+0, 2.2001477544001982e+0, 7.6523373562092243e+0], [-5.0842519108140822e-5, -4.7009125806947251e-4, -1.3801508317346789e-3, -2.9506691354813850e-3, -5.5208111199172333e-3, -9.7742380151758683e-3, -1.7203283856258003e-2, -3.1552552415606711e-2, -6.4584857945403554e-2, -1.7136118476179036e-1, -1.0151660849785561e+0], [6.0002098119040435e-7, 5.6026315148312852e-6, 1.6783499284037082e-5, 3.7028894411294123e-5, 7.2437205851639396e-5, 1.3622968549715685e-4, 2.5994577058040005e-4, 5.3150552624238682e-4, 1.2637181469177176e-3, 4.1532995563000911e-3, 3.2497423300034365e-2], [-6.1916080884698312e-9, -5.8163012323059798e-8, -1.7639308558177198e-7, -3.9667750941562446e-7, -7.9703014326759923e-7, -1.5532570513145588e-6, -3.1033060659638420e-6, -6.7221937543710168e-6, -1.7090549975999750e-5, -5.8673866038583841e-5, -2.8972358380141834e-4], [8.9126202917111569e-11, 8.3541497951655508e-10, 2.5219141999700897e-9, 5.6279049836101633e-9, 1.1172534477478074e-8, 2.1361072772235622e-8, 4.1317809630945515e-8, 8.4064052929963202e-8, 1.8303931398060353e-7, 3.0563053916672399e-7, -8.5212616523347640e-6], [3.3996345112616539e-13, 3.1300855058895676e-12, 9.1272724720946047e-12, 1.9426201643205756e-11, 3.6751239994379894e-11, 6.9101012477950802e-11, 1.4640316448575806e-10, 4.1658775980313712e-10, 1.9053118990497657e-9, 1.5775709384187203e-8, 2.4281389532116297e-8], [3.4550827519914082e-15, 2.8542653722697768e-14, 6.1829482184585844e-14, 4.9351642985897589e-14, -1.6920480882399008e-13, -1.0964892327881838e-12, -4.4904526318598328e-12, -1.7622255847978003e-11, -7.8392802432774916e-11, -4.0495146415470670e-10, 7.0571357631688379e-9], [-1.4788007569048008e-15, -1.3787711075720342e-14, -4.1160871158702203e-14, -9.0216491409905843e-14, -1.7437744578497021e-13, -3.2083512619315772e-13, -5.8793999400395098e-13, -1.1176571507297750e-12, -2.4386460230250895e-12, -1.2053527143078364e-11, 7.0252486975946647e-11], [-4.1396957561941102e-17, -3.8366741431733202e-16, -1.1314754417355054e-15, -2.4332881102319583e-15, -4.5784816655026550e-15, -8.1156218181343015e-15, -1.4059651706320760e-14, -2.3717683519627245e-14, -2.8662329952091653e-14, 1.9793645602475535e-13, -5.5658761551834611e-12], [5.7117714671546679e-19, 5.4505678431869939e-18, 1.7054154694331746e-17, 4.0166890546132252e-17, 8.5743848711989287e-17, 1.7985686680962490e-16, 3.9062879073975940e-16, 9.2004090017557940e-16, 2.4786090437137750e-15, 1.1212339444135230e-14, -1.2786905678091224e-13], [6.7727518746150852e-20, 6.3159231732163077e-19, 1.8868209045120955e-18, 4.1433140170420796e-18, 8.0446910053022221e-18, 1.4951108495028748e-17, 2.7990708046235846e-17, 5.5386401969567771e-17, 1.2146037954753082e-16, 1.7674864511381216e-16, 3.6652296415050096e-15], [1.2995561408068676e-21, 1.1994494152815061e-20, 3.5056904558772277e-20, 7.4234242400120004e-20, 1.3618285339976100e-19, 2.3140200470340406e-19, 3.7194961174247081e-19, 5.4166361238325845e-19, 4.6851615367419471e-19, -3.0801748107840593e-18, 1.5053508209144880e-16], [-3.9755376936918251e-23, -3.7439515072938464e-22, -1.1412755229946859e-21, -2.5870505104783056e-21, -5.2567052846312537e-21, -1.0401678598794406e-20, -2.1222072183443191e-20, -4.7447287132837701e-20, -1.2811392707775701e-19, -4.2466794754885793e-19, -1.8027178562601181e-18], [-2.7165945567367699e-24, -2.5319969511573916e-23, -7.5560708174778915e-23, -1.6566646983858286e-22, -3.2100057359058759e-22, -5.9500768244018978e-22, -1.1095914073784899e-21, -2.1784433998858886e-21, -4.7468945961265818e-21, -1.3148645511512585e-20, -1.4326610671461467e-19]],
        [[1.4961763406371303e-3, 1.3672104808580685e-2, 3.9182717119752379e-2, 8.0650863992415952e-2, 1.4293928792693060e-1, 2.3488770947588124e-1, 3.7341373707231237e-1, 5.9456401213868039e-1, 9.9047658992139332e-1, 1.8884941961027968e+0, 5.8694020410898491e+0], [-4.6314839480858776e-5, -4.2783053741541790e-4, -1.2536515498611756e-3, -2.6719225750167415e-3, -4.9764868153971552e-3, -8.7530678242731060e-3, -1.5261284130892185e-2, -2.7599881425159508e-2, -5.5243558717436379e-2, -1.4084795364552055e-1, -7.7131282070345393e-1], [5.3447275257957874e-7, 4.9866517008510940e-6, 1.4913950310080471e-5, 3.2819406854866654e-5, 6.3963822333397633e-5, 1.1967287620882421e-4, 2.2673329354643291e-4, 4.5907823930554696e-4, 1.0770647280256631e-3, 3.4869838120859270e-3, 2.8249395476578100e-2], [-4.7230176859294239e-9, -4.4410377764272820e-8, -1.3495412798704665e-7, -3.0444642853260723e-7, -6.1450809570735742e-7, -1.2053162897730352e-6, -2.4309183812588649e-6, -5.3451324753001530e-6, -1.3982999027941501e-5, -5.1884440799872315e-5, -4.1271180294596404e-4], [9.2782124795767534e-11, 8.6788818388054466e-10, 2.6092702929753466e-9, 5.7883649389335501e-9, 1.1406687126167255e-8, 2.1641969085718684e-8, 4.1656502445306168e-8, 8.5374852316571941e-8, 1.9673281746685566e-7, 5.0203472463302333e-7, -6.3000570364989869e-6], [-1.8415507544594174e-13, -1.8324764103642281e-12, -6.1740273988102216e-12, -1.5922355940087313e-11, -3.7212141608492074e-11, -8.3988495991039959e-11, -1.8869793620461037e-10, -4.2157423153563469e-10, -7.8466287935863519e-10, 3.1300224146788259e-9, 1.9416742164676314e-7], [-4.9288626795943239e-14, -4.6157728555005149e-13, -1.3912717565066583e-12, -3.1007617613232131e-12, -6.1608916074172623e-12, -1.1867115343722436e-11, -2.3536048761191238e-11, -5.1511298091020339e-11, -1.3985842926622010e-10, -5.8699827838222763e-10, 6.1036342364536054e-9], [-1.8950163877605603e-15, -1.7534930638006672e-14, -5.1524529534211382e-14, -1.1006242435107668e-13, -2.0462851202199850e-13, -3.5499174119803316e-13, -5.9111080003162811e-13, -9.2862249426924028e-13, -1.0911614224075488e-12, 1.4056022569187240e-12, -1.4276978028571353e-10], [3.2729853071775384e-17, 3.1035790182110089e-16, 9.5896080442174593e-16, 2.2171732717285341e-15, 4.6207010521897984e-15, 9.4212664103059117e-15, 1.9876606452567304e-14, 4.6096546181000273e-14, 1.3082657799391947e-13, 6.2940336551881249e-13, -6.3397120147546148e-12], [3.3433242701282024e-18, 3.1153799914038575e-17, 9.2914860749514572e-17, 2.0346888883216118e-16, 3.9331294854939669e-16, 7.2562255815453623e-16, 1.3399693043182076e-15, 2.5714016613135208e-15, 5.2116715830590375e-15, 8.1494757192083161e-15, 1.0293840615158868e-13], [3.3111586345015590e-20, 3.0099913125571454e-19, 8.5066806006069899e-19, 1.6957561586379728e-18, 2.7941014078313882e-18, 3.8388054637938767e-18, 3.4132760242941808e-18, -4.9767054927254725e-18, -5.7308420418386551e-17, -5.0979454307067322e-16, 6.2632068098899636e-15], [-3.7111277484532867e-21, -3.4768224927189162e-20, -1.0486564718221545e-19, -2.3381956205394548e-19, -4.6420014711505240e-19, -8.9017292008447467e-19, -1.7410732403476446e-18, -3.6655608463147584e-18, -8.9158829811409653e-18, -2.5460298525348555e-17, -6.2936084932360130e-17], [-1.3144325780006426e-22, -1.2206756323244007e-21, -3.6147347365585572e-21, -7.8234598187275619e-21, -1.4854076976536531e-20, -2.6664215024955964e-20, -4.7135459866430535e-20, -8.3727096353143040e-20, -1.4288840581102448e-19, -2.6377735375286126e-20, -5.4693579886641276e-18], [1.7694013959569260e-24, 1.6832333356132379e-23, 5.2368240145683248e-23, 1.2247498657914697e-22, 2.5980140450203592e-22, 5.4398764912383385e-22, 1.1940369696611984e-21, 2.9336447142356095e-21, 8.9316654316182257e-21, 3.9820523050434797e-20, 3.4053876952438666e-20]],
        [[1.4076602891378680e-3, 1.2854811259226123e-2, 3.6790083482555998e-2, 7.5559081353031406e-2, 1.3347678865918596e-1, 2.1829715446727200e-1, 3.4462033085963792e-1, 5.4284943743881234e-1, 8.8811086963590390e-1, 1.6328190886803107e+0, 4.5361010349650761e+0], [-4.2241298956570522e-5, -3.8984035224633720e-4, -1.1401312383421986e-3, -2.4224610986298663e-3, -4.4912866340735638e-3, -7.8478948118257321e-3, -1.3553278279816703e-2, -2.4161705238725465e-2, -4.7247101291985696e-2, -1.1530595884486896e-1, -5.6650281726283348e-1], [4.8633286899537982e-7, 4.5335070847972189e-6, 1.3533936163038656e-5, 2.9695800383935007e-5, 5.7629948159493082e-5, 1.0717405514867196e-4, 2.0132627904487502e-4, 4.0262211145885660e-4, 9.2704278831632142e-4, 2.9122913404917945e-3, 2.2841401020983930e-2], [-3.3467124966947732e-9, -3.1552609639820915e-8, -9.6396195256178070e-8, -2.1924047054469529e-7, -4.4747029606436631e-7, -8.9042201872976679e-7, -1.8290844018800728e-6, -4.1185851665652250e-6, -1.1143165531148011e-5, -4.4060513653777462e-5, -4.7619916475602768e-4], [7.4058214161256073e-11, 6.9090566468395798e-10, 2.0660614512625432e-9, 4.5460744243447729e-9, 8.8606763649655788e-9, 1.6584250310382483e-8, 3.1443714955093102e-8, 6.3666200525901730e-8, 1.4805740255677029e-7, 4.3918101065990147e-7, -1.3739527768118666e-6], [-1.7747010081461159e-12, -1.6650146807968255e-11, -5.0353078039162159e-11, -1.1266459067187437e-10, -2.2443814507297357e-10, -4.3102810437998781e-10, -8.3903144573942076e-10, -1.7276715904010293e-9, -3.8972292395251021e-9, -8.1290196027134227e-9, 2.7469932618667686e-7], [-7.0053033662232758e-14, -6.4968561622681420e-13, -1.9187214065975625e-12, -4.1364071919633383e-12, -7.8161093518892970e-12, -1.3972383821305759e-11, -2.4744589530578799e-11, -4.5253409689004672e-11, -9.1399814091437765e-11, -2.6093198667005113e-10, 1.1557902764783573e-10], [9.3086481167935574e-16, 8.9011207353853307e-15, 2.7961629649538525e-14, 6.6240738095765985e-14, 1.4251080148411720e-13, 3.0221007017462437e-13, 6.6837781168681467e-13, 1.6367362042339249e-12, 4.8589682789917320e-12, 2.0440935598049002e-11, -2.4755986842451899e-10], [1.2600942603306319e-16, 1.1731660699685498e-15, 3.4923756201756231e-15, 7.6233187495764131e-15, 1.4660528950906222e-14, 2.6825532461858684e-14, 4.8879160485748338e-14, 9.1791157819311704e-14, 1.8136415138437577e-13, 3.4561616623702086e-13, 5.9571384557741436e-13], [3.3870366368510180e-19, 2.8141106681160279e-18, 6.2602584447034284e-18, 6.1407491556536053e-18, -1.0031164894298178e-17, -7.8063154850321853e-17, -3.1093229827897696e-16, -1.1263044904494618e-15, -4.5357782572579008e-15, -2.6399136947134174e-14, 2.3416486168844555e-13], [-1.8073317055542943e-19, -1.6892116509949791e-18, -5.0696337084423538e-18, -1.1212815916052256e-17, -2.1991405878625771e-17, -4.1414395585230338e-17, -7.8773743913708738e-17, -1.5828920735004968e-16, -3.5160325386777224e-16, -8.1188719375885305e-16, -8.1865352318623020e-16], [-3.0478250948270848e-21, -2.7999629540919199e-20, -8.0993008125239726e-20, -1.6833684988187305e-19, -2.9884140918016472e-19, -4.7741600081997329e-19, -6.6839317013899247e-19, -5.8310395134482074e-19, 1.8411044778339936e-18, 2.7945641240935214e-17, -2.1105707616944538e-16], [2.1941974035113278e-22, 2.0598031208026820e-21, 6.2384021929773633e-21, 1.4000616638385162e-20, 2.8054232025728811e-20, 5.4480461486217293e-20, 1.0834394466164517e-19, 2.3297361619403869e-19, 5.8121589054084395e-19, 1.7600273996721821e-18, 4.0491450159273341e-19], [7.6237841577766774e-24, 7.0777894158878843e-23, 2.0942326450098475e-22, 4.5246435721068118e-22, 8.5587401005931205e-22, 1.5239768331572580e-21, 2.6437678891707565e-21, 4.4596780634838735e-21, 6.0786708467153646e-21, -1.7910013393211354e-20, 1.6290167288815877e-19]],
        [[1.3048665417644203e-3, 1.1906756206583995e-2, 3.4021144112461576e-2, 6.9688637931584034e-2, 1.2262772226281899e-1, 1.9942704090699587e-1, 3.1224831583644481e-1, 4.8571494665615402e-1, 7.7819260203889930e-1, 1.3727026401416119e+0, 3.3592824847913311e+0], [-5.9891251249818358e-5, -5.5206352406627348e-4, -1.6105216427022264e-3, -3.4081274043414698e-3, -6.2811971183787964e-3, -1.0881812290891924e-2, -1.8560366336379809e-2, -3.2471854990203928e-2, -6.1574345407057171e-2, -1.4167538153033018e-1, -5.9095146145425079e-1], [1.1341092850821568e-6, 1.0557758766075390e-5, 3.1430261743427033e-5, 6.8655253882923265e-5, 1.3236329951282688e-4, 2.4384811695315659e-4, 4.5190524412466195e-4, 8.8570073575153932e-4, 1.9746940197022357e-3, 5.8492714449323411e-3, 3.9918062515569588e-2], [-1.0051112382382489e-8, -9.5159201020360346e-8, -2.9313445564265072e-7, -6.7482746670548487e-7, -1.3990115079485728e-6, -2.8361976145751550e-6, -5.9489494148725751e-6, -1.3694382909388846e-5, -3.7867427608515729e-5, -1.5293863198751681e-4, -1.7815015601551360e-3], [6.7916306567032896e-11, 6.3340007608379479e-10, 1.8958362322890169e-9, 4.1961185294718981e-9, 8.3278386152791055e-9, 1.6281687248967557e-8, 3.3868119269474045e-8, 8.2217590867290867e-8, 2.6743439405965176e-7, 1.5038781827038719e-6, 3.0599168295911115e-5], [-2.6746748361547146e-11, -2.4849176636740897e-10, -7.3650974009057286e-10, -1.5965695671930857e-9, -3.0396256348748819e-9, -5.4839299158634217e-9, -9.7977884008852277e-9, -1.7888861696037533e-8, -3.3726309877499266e-8, -4.9821441088181586e-8, 1.6894085432206045e-6], [5.7195359305801485e-13, 5.4388728155752033e-12, 1.6895082609285354e-11, 3.9341258317694020e-11, 8.2620761741646437e-11, 1.6947935206924498e-10, 3.5747802022842138e-10, 8.1294562108204539e-10, 2.1047624886190458e-9, 6.2176102345148963e-9, -1.0162670038170823e-7], [9.2624086264387672e-14, 8.6021661982275097e-13, 2.5475351257589142e-12, 5.5142108887425622e-12, 1.0470978198707398e-11, 1.8804814890938344e-11, 3.3316187082140994e-11, 5.9838571635993271e-11, 1.0901415462271380e-10, 1.5679328068874740e-10, -1.4396159214917687e-9], [-2.1454669970090790e-15, -2.0462145804982460e-14, -6.3947872077200842e-14, -1.5032416287913629e-13, -3.2002149346285443e-13, -6.6913765761055122e-13, -1.4508361312464029e-12, -3.4437207562922716e-12, -9.6437985975207554e-12, -3.5538310743353595e-11, 2.7870892166603774e-10], [-3.6361393529609901e-16, -3.3790545177473647e-15, -1.0019386849633159e-14, -2.1725549076536043e-14, -4.1340674667666119e-14, -7.4370435396492783e-14, -1.3164222696517552e-13, -2.3362421494968414e-13, -3.9727361164527893e-13, -1.8197687218449495e-13, -1.8774766868537378e-12], [8.8941062516649514e-18, 8.4824721758011861e-17, 2.6511961771892156e-16, 6.2354451091121793e-16, 1.3292437352514402e-15, 2.7870039009040540e-15, 6.0721746194680588e-15, 1.4522358426311264e-14, 4.1067697227584769e-14, 1.5214777278670219e-13, -6.8056716161648625e-13], [1.4043610942189463e-18, 1.3062338341628646e-17, 3.8802419306948537e-17, 8.4375607870559244e-17, 1.6118571030708640e-16, 2.9142708487744678e-16, 5.1877423497408550e-16, 9.2364352190321819e-16, 1.5356953774862068e-15, -2.6185688752211148e-16, 1.4452951444788612e-14], [-3.6002914880954667e-20, -3.4358779907315996e-19, -1.0754379434183063e-18, -2.5358778366934037e-18, -5.4287070177435290e-18, -1.1457833928656445e-17, -2.5216532036761991e-17, -6.1209201992538438e-17, -1.7647997865599002e-16, -6.5282529260688558e-16, 1.6147825243126924e-15], [-5.4270704805050973e-21, -5.0535709264792270e-20, -1.5046660465214025e-19, -3.2836624623368505e-19, -6.3043543114672277e-19, -1.1472514037030556e-18, -2.0577732094804233e-18, -3.6850390355470822e-18, -6.0143376504647325e-18, 4.4344771470610337e-18, -4.7987977692789449e-17]],
        [[1.1937663514113453e-3, 1.0883396144790386e-2, 3.1040176722207718e-2, 6.3395518657684408e-2, 1.1107029123149709e-1, 1.7950535239176117e-1, 2.7851601398959648e-1, 4.2733971926789755e-1, 6.6943277740320291e-1, 1.1306057939826752e+0, 2.4360505706753520e+0], [-5.1314769968370263e-5, -4.7229702289156411e-4, -1.3735184489936495e-3, -2.8920323887051570e-3, -5.2907327391866065e-3, -9.0690014619577857e-3, -1.5232263323191572e-2, -2.6039802792722201e-2, -4.7552739415971660e-2, -1.0183740419687660e-1, -3.4709097905732030e-1], [1.0065967273205853e-6, 9.3524308825503717e-6, 2.7729224368987803e-5, 6.0177667875279674e-5, 1.1491222324268569e-4, 2.0881008401097091e-4, 3.7937337673181426e-4, 7.2178374485508907e-4, 1.5337850691016967e-3, 4.1508265015184933e-3, 2.2164726286220020e-2], [-1.1869224558793235e-8, -1.1188103669132181e-7, -3.4159369831059396e-7, -7.7567416533988151e-7, -1.5776280991664169e-6, -3.1174992715846126e-6, -6.3200330186162459e-6, -1.3887498877180635e-5, -3.5880765690997413e-5, -1.2928536704769648e-4, -1.1519790152006064e-3], [-1.9530034224941730e-10, -1.7907968919043261e-9, -5.1583238853140109e-9, -1.0639169513899709e-8, -1.8632001970232654e-8, -2.9009061315539834e-8, -3.8260979386889853e-8, -2.4433682618896726e-8, 1.5249034539711417e-7, 1.7924598232359846e-6, 4.1143945191663838e-5], [2.7209851530951452e-12, 2.6742880160440362e-11, 8.8258935613547673e-11, 2.2246167197440354e-10, 5.1026542002927204e-10, 1.1433290448189264e-9, 2.6142872169680609e-9, 6.3473801273605119e-9, 1.7105360798404694e-8, 5.0920360297913718e-8, -4.2737593439354973e-7], [1.1600469782846605e-12, 1.0747073678417365e-11, 3.1661183533999514e-11, 6.7934023980890270e-11, 1.2724040062002525e-10, 2.2361291444862286e-10, 3.8207422158252069e-10, 6.4025429421511369e-10, 9.7060816068306756e-10, -1.0029364702666108e-10, -5.3052029267450664e-8], [-5.1484437888194202e-14, -4.8424520370065751e-13, -1.4718580272973832e-12, -3.3182980519518500e-12, -6.6774267360567579e-12, -1.2987268811853395e-11, -2.5676081723411925e-11, -5.3939074286276934e-11, -1.2609500327389798e-10, -3.2168497723291165e-10, 3.2151471051385122e-9], [-2.5958975828887775e-15, -2.3834457999768271e-14, -6.8872091387164136e-14, -1.4296202014372439e-13, -2.5364316818288997e-13, -4.0658094042014470e-13, -5.8218193844146589e-13, -6.0878438717857936e-13, 6.3470302416810587e-13, 1.1844918324078337e-11, -1.6277547850579209e-11], [2.6685174677422755e-16, 2.4950870438412996e-15, 7.4928082646692752e-15, 1.6579542796101374e-14, 3.2499368798320466e-14, 6.1011823310814290e-14, 1.1499970781978516e-13, 2.2587672466937766e-13, 4.7405637279590934e-13, 9.2994530719143349e-13, -7.1016359262502672e-12], [1.5431181110780122e-18, 1.2762704418692862e-17, 2.7991680391161056e-17, 2.5621240239907630e-17, -5.3254267040762390e-17, -3.7497041731056346e-16, -1.4505889178885762e-15, -5.0755537778441646e-15, -1.8951503789040895e-14, -8.5345551320407687e-14, 3.2492848474531818e-13], [-1.0278887257478347e-18, -9.5699397236565390e-18, -2.8483296122259857e-17, -6.2117519873495582e-17, -1.1912628084396838e-16, -2.1642256708292299e-16, -3.8750458242505787e-16, -6.9543340938856310e-16, -1.1847168430886232e-15, -4.1522055811761844e-16, 6.0629561929662008e-15], [2.5001312178525793e-20, 2.3916122275838352e-19, 7.5175975073116523e-19, 1.7817070181825547e-18, 3.8308035680740966e-18, 8.0940105398922296e-18, 1.7699908675690122e-17, 4.2024367660007489e-17, 1.1430877778501647e-16, 3.5674365174224239e-16, -1.1076095888009533e-15], [3.0236193758583382e-21, 2.7982760626670690e-20, 8.2225371834808173e-20, 1.7547484620673871e-19, 3.2502154910805004e-19, 5.5775154411086292e-19, 9.0113395051290081e-19, 1.2825744069847403e-18, 6.6023129936403731e-19, -1.2136373515286452e-17, 2.2846833833119514e-17]],
        [[1.0987082980200267e-3, 1.0009094690207435e-2, 2.8501212810722428e-2, 5.8061837354983482e-2, 1.0134557968613912e-1, 1.6291574274890959e-1, 2.5084287902650608e-1, 3.8051025292419087e-1, 5.8528247676062926e-1, 9.5561241088648799e-1, 1.8826850635891245e+0], [-4.3873626740984790e-5, -4.0322900673968999e-4, -1.1691593231368571e-3, -2.4499957075604780e-3, -4.4507146495379892e-3, -7.5530605018301779e-3, -1.2505056271243701e-2, -2.0926145525772647e-2, -3.6934310230755862e-2, -7.4283746308039443e-2, -2.1483619066237930e-1], [8.5059773564773285e-7, 7.8868061324825406e-6, 2.3284220270347949e-5, 5.0187305044995961e-5, 9.4879865931447309e-5, 1.6996243822956585e-4, 3.0253048884042235e-4, 5.5835154389589260e-4, 1.1303826931230317e-3, 2.7985841453766319e-3, 1.1860916859128251e-2], [-1.3600702656730552e-8, -1.2742977809982244e-7, -3.8431577984105655e-7, -8.5627877127368940e-7, -1.6960461613532237e-6, -3.2348716164274707e-6, -6.2574218891650737e-6, -1.2905839073099365e-5, -3.0456025320997444e-5, -9.4695983332603414e-5, -6.0382371534093526e-4], [6.0869377325589279e-12, 9.4790906445067833e-11, 5.1889325622379095e-10, 1.9665484765160577e-9, 6.1680978617665796e-9, 1.7668406904468769e-8, 4.9631913697016702e-8, 1.4643834377004891e-7, 4.9788692089816436e-7, 2.3329912545444608e-6, 2.6176648150184752e-5], [1.1570099335927376e-11, 1.0739244319545133e-10, 3.1758832888691762e-10, 6.8536840377993472e-10, 1.2936110060039194e-9, 2.2949818961175483e-9, 3.9620741443249712e-9, 6.6891803850915900e-9, 9.9391748771328878e-9, -6.3394899015794643e-9, -8.2652119316560821e-7], [-2.7079741012084299e-13, -2.5748513538607472e-12, -7.9952046067301185e-12, -1.8595703072693891e-11, -3.8948034136222904e-11, -7.9459392327527081e-11, -1.6588983044113035e-10, -3.7030559968580762e-10, -9.2857239671950944e-10, -2.6828006354233469e-9, 8.6261888390199921e-9], [-2.5040595837647651e-14, -2.3016725634751018e-13, -6.6674854103897408e-13, -1.3903554773381812e-12, -2.4873593153350230e-12, -4.0528665422270077e-12, -6.0322412068752607e-12, -7.2961872416440326e-12, 3.7503920603702173e-13, 8.5444176573439700e-11, 9.5133835816450296e-10], [2.1879968169682609e-15, 2.0400352867146845e-14, 6.0904127077133058e-14, 1.3349767214758284e-13, 2.5805380290581965e-13, 4.7476347592771430e-13, 8.6871961587774273e-13, 1.6295211918014195e-12, 3.1516683168673137e-12, 4.8703334626102340e-12, -6.9925340293890873e-11], [-3.3855588869076677e-17, -3.2662134145314687e-16, -1.0428787978009678e-15, -2.5227889370391496e-15, -5.5463155451443881e-15, -1.1964092785057930e-14, -2.6576039665418872e-14, -6.3540232638491764e-14, -1.7219232009936105e-13, -5.4408419702529758e-13, 1.9168310134809975e-12], [-5.1950866769826855e-18, -4.7891587900387225e-17, -1.3959026451852647e-16, -2.9406741185629104e-16, -5.3449697633982486e-16, -8.9307396984991784e-16, -1.3897247920576830e-15, -1.8754702962016805e-15, -9.1384236076093615e-16, 1.4137441357354075e-14, 4.5279185225505205e-14], [3.6872296778422166e-19, 3.4480652066332931e-18, 1.0356243987623534e-17, 2.2913117906630848e-17, 4.4872708543464478e-17, 8.3998085481298933e-17, 1.5718157113561732e-16, 3.0335655975337005e-16, 6.0781037798802408e-16, 9.8896618885789122e-16, -6.7513281957337968e-15], [-2.1461111688721060e-21, -2.2372188674685231e-20, -8.1432755058018641e-20, -2.2987281390522231e-19, -5.9038617535370389e-19, -1.4723978431669115e-18, -3.7281097809116836e-18, -1.0019328755424863e-17, -3.0111832770211643e-17, -1.0284287445366386e-16, 2.6339216458525121e-16], [-1.0470522334384948e-21, -9.6804513506729304e-21, -2.8386428325997003e-20, -6.0381549078204660e-20, -1.1133160789662906e-19, -1.8995644873488511e-19, -3.0530980966727349e-19, -4.3813391308119070e-19, -3.1160348034907822e-19, 2.7230877984893110e-18, 1.6955461716482428e-18]],
        [[1.0172598938594158e-3, 9.2609970080007954e-3, 2.6334928155468215e-2, 5.3531748753833863e-2, 9.3140974794261117e-2, 1.4905160919390888e-1, 2.2802777910846387e-1, 3.4266718355849542e-1, 5.1940055221053585e-1, 8.2626524942071439e-1, 1.5292166396113329e+0], [-3.7705413703998929e-5, -3.4609020628246942e-4, -1.0007942721484886e-3, -2.0882151998786199e-3, -3.7698320935007920e-3, -6.3411017187971757e-3, -1.0367152155869034e-2, -1.7031964579256243e-2, -2.9209863308736063e-2, -5.5833610219087663e-2, -1.4296612281802896e-1], [6.9410808997145350e-7, 6.4234926275219808e-6, 1.8888837974544395e-5, 4.0455976865971688e-5, 7.5777595813411799e-5, 1.3397440470593847e-4, 2.3407131918655449e-4, 4.2039396126901387e-4, 8.1569735989797287e-4, 1.8732560279065172e-3, 6.6345801906812435e-3], [-1.2124203938011972e-8, -1.1316909633302398e-7, -3.3867839791833104e-7, -7.4548858082193681e-7, -1.4512177793238555e-6, -2.7026147953174345e-6, -5.0595341519599913e-6, -9.9670593823559857e-6, -2.1970391225419153e-5, -6.0935946744752162e-5, -3.0063290760937150e-4], [1.4882292158414815e-10, 1.4104265163583377e-9, 4.3522253157329910e-9, 1.0036232534711939e-8, 2.0814815007572877e-8, 4.2068983585466353e-8, 8.7328139968367185e-8, 1.9597882626902898e-7, 5.1120115776320214e-7, 1.7876058661600076e-6, 1.2848605336977235e-5], [2.6873904482360164e-12, 2.4263764013073424e-11, 6.7520114214271111e-11, 1.3071216625845527e-10, 2.0336649992884156e-10, 2.4288648827654261e-10, 8.7935924016056877e-11, -9.1446478009008902e-10, -5.9536724493950858e-9, -3.7745434334430960e-8, -4.8691053014095945e-7], [-3.0689477499643458e-13, -2.8498922032044202e-12, -8.4366360720619361e-12, -1.8240467881395573e-11, -3.4538633735540203e-11, -6.1622152387191807e-11, -1.0754724765697180e-10, -1.8615292422043287e-10, -3.0189582799174484e-10, -1.0388095915569924e-10, 1.4465574029866507e-8], [1.0733695877901923e-14, 1.0085378170822474e-13, 3.0587739059116528e-13, 6.8712298371382674e-13, 1.3750977062883074e-12, 2.6523872034052201e-12, 5.1779391973956127e-12, 1.0664135123018676e-11, 2.4154651880959555e-11, 5.9720801491125697e-11, -2.0860168794974209e-10], [1.1710396940130500e-16, 1.0169719589789631e-15, 2.5741833591402730e-15, 4.0342065574236227e-15, 3.2774034965150223e-15, -5.7588362553995780e-15, -4.1604566074846443e-14, -1.6788248469555438e-13, -6.4690815285430103e-13, -2.8882876066663331e-12, -9.6735621964374156e-12], [-3.5369198893099732e-17, -3.2705491487080156e-16, -9.5962070941103443e-16, -2.0449369951782918e-15, -3.7883379879715241e-15, -6.5403744594523543e-15, -1.0837577295089099e-14, -1.7084245499852481e-14, -2.1691848425790340e-14, 2.7636848599387517e-14, 9.3434825985978282e-13], [1.8918633912172781e-18, 1.7672581153842243e-17, 5.2963757204549367e-17, 1.1678720547142875e-16, 2.2764895039982747e-16, 4.2357833881552814e-16, 7.8695012698407431e-16, 1.5085353629001515e-15, 3.0306684621563047e-15, 5.4727790399611556e-15, -3.9661246683856451e-14], [-2.4310506351007210e-20, -2.3629454859317329e-19, -7.6477641077046543e-19, -1.8824272223600238e-18, -4.2158328645924945e-18, -9.2511695960915275e-18, -2.0823493773423536e-17, -5.0099272900471731e-17, -1.3494282456340105e-16, -4.1423978223015532e-16, 7.1969168636486971e-16], [-3.3737366094159322e-21, -3.0952702317084205e-20, -8.9293649629096078e-20, -1.8482861122350126e-19, -3.2642992921748240e-19, -5.1944362585908743e-19, -7.3496977654171628e-19, -7.5395867085586419e-19, 7.3383830631356437e-19, 1.2564072197787845e-17, 2.8819062273853525e-17], [2.6386712310882438e-22, 2.4558302611442945e-21, 7.3034566923611573e-21, 1.5903315175921027e-20, 3.0416127723590962e-20, 5.5003296458382642e-20, 9.7740238483058978e-20, 1.7351137222645208e-19, 2.9513841754902282e-19, 2.3185206303169837e-19, -3.0564729440364450e-18]],
        [[9.4697114580032313e-4, 8.6161868764867008e-3, 2.4472447413919717e-2, 4.9652617359456194e-2, 8.6156438829520320e-2, 1.3734656504024503e-1, 2.0899020074984004e-1, 3.1162364816241284e-1, 4.6676269047115933e-1, 7.2757466405688094e-1, 1.2869863292427769e+0], [-3.2692046194141723e-5, -2.9973332723737694e-4, -8.6471106435197501e-4, -1.7975454641889389e-3, -3.2275297489545783e-3, -5.3876249283408051e-3, -8.7142402853922342e-3, -1.4096448003237959e-2, -2.3610465760202747e-2, -4.3342381877330301e-2, -1.0145391591412606e-1], [5.6365583642696643e-7, 5.2074046957719782e-6, 1.5259160289586083e-5, 3.2499976701284188e-5, 6.0383371640169636e-5, 1.0554564526805399e-4, 1.8146584886417595e-4, 3.1845522605684744e-4, 5.9644278668018190e-4, 1.2894299363461386e-3, 3.9939295017575389e-3], [-9.6140067648270061e-9, -8.9507407998634472e-8, -2.6644522513125435e-7, -5.8157414158672608e-7, -1.1184630040452460e-6, -2.0479496973221314e-6, -3.7447335818448159e-6, -7.1338897205756793e-6, -1.4952674360394868e-5, -3.8107411419903718e-5, -1.5640879755502154e-4], [1.5210039220663764e-10, 1.4286242433949008e-9, 4.3298767641151170e-9, 9.7177028848477988e-9, 1.9430206462026466e-8, 3.7473359359957495e-8, 7.3348089706324015e-8, 1.5282487944362056e-7, 3.6151313795581768e-7, 1.0963726650408308e-6, 6.0258317669082032e-6], [-1.3837507651528624e-12, -1.3342315385550252e-11, -4.2565834227077007e-11, -1.0291054094058449e-10, -2.2634921617434084e-10, -4.8954910431139452e-10, -1.0950907821502338e-9, -2.6631837763250645e-9, -7.5635103579029543e-9, -2.8871889225741570e-8, -2.2294050167633520e-7], [-6.0604060277308236e-14, -5.5183045257971444e-13, -1.5653766971095705e-12, -3.1424971908736859e-12, -5.2505808265121809e-12, -7.4653740125398063e-12, -7.7044399991181464e-12, 3.5051483052867240e-12, 7.5494837140558158e-11, 5.7079212478415124e-10, 7.5709190553782036e-9], [5.2806268077746424e-15, 4.8963040112858134e-14, 1.4449449700551091e-13, 3.1085179103209747e-13, 5.8432309938587334e-13, 1.0316528240254007e-12, 1.7728592486874724e-12, 2.9924638326326905e-12, 4.6002685298673098e-12, 2.8343374950698647e-13, -2.1603861036216006e-10], [-2.2602048247124090e-16, -2.1110526822549765e-15, -6.3254323449045578e-15, -1.3946408585620695e-14, -2.7194250376407336e-14, -5.0672699750523577e-14, -9.4527292139723155e-14, -1.8313844290002189e-13, -3.7938040317685620e-13, -7.8791030651056673e-13, 3.9847065645553102e-12], [4.2418314013793587e-18, 4.0368082916672551e-17, 1.2556288662767429e-16, 2.9278544228062052e-16, 6.1530902883056495e-16, 1.2607907286754646e-15, 2.6472784436874026e-15, 5.9584659052456248e-15, 1.5172812802705836e-14, 4.6308268104948251e-14, 4.1189790768400559e-14], [1.9472034317159076e-19, 1.7662512192689136e-18, 4.9697075249537121e-18, 9.8411416342999556e-18, 1.6082746582304203e-17, 2.1987194200600040e-17, 2.0453413200431627e-17, -1.7725831230131114e-17, -2.2923907685640668e-16, -1.4407343448924998e-15, -8.0386539121657791e-15], [-2.1656051915453764e-20, -2.0038510588981229e-19, -5.8880527542586276e-19, -1.2578486334229472e-18, -2.3397052900697979e-18, -4.0672199713902898e-18, -6.8264408994927916e-18, -1.1081644120464368e-17, -1.5704903383287584e-17, 3.1106802004985059e-18, 4.2708225314592014e-16], [9.8519032163812858e-22, 9.1939240659057713e-21, 2.7496902527323357e-20, 6.0430437164423471e-20, 1.1721596225751741e-19, 2.1655632102771496e-19, 3.9821914820836985e-19, 7.5180545694699326e-19, 1.4753226856716575e-18, 2.5854126803356348e-18, -1.3978170158312933e-17], [-1.8070984918480615e-23, -1.7241037067757542e-22, -5.3876710313994166e-22, -1.2637742924763999e-21, -2.6719549858591351e-21, -5.4987179378715257e-21, -1.1543607879079373e-20, -2.5718728919569974e-20, -6.3260333329449312e-20, -1.7107614572283649e-19, 2.1321149865781764e-19]],
        [[8.8575858199923542e-4, 8.0552372785626786e-3, 2.2855757270902842e-2, 4.6297179380716085e-2, 8.0145433614858545e-2, 1.2734454565387953e-1, 1.9288413001391503e-1, 2.8573406102494707e-1, 4.2380741903438488e-1, 6.4994179562444008e-1, 1.1110547788986872e+0], [-2.8605320280574875e-5, -2.6200499127556208e-4, -7.5432202420286728e-4, -1.5629895639585877e-3, -2.7932311235257472e-3, -4.6321386800891814e-3, -7.4239771615418249e-3, -1.1853581512989994e-2, -1.9469039890909739e-2, -3.4597071876894686e-2, -7.5654951882053825e-2], [4.6182656611227792e-7, 4.2603121692712668e-6, 1.2445677692284088e-5, 2.6378988942345782e-5, 4.8667091028016973e-5, 8.4233151485633671e-5, 1.4284888763357128e-4, 2.4583120370211667e-4, 4.4711574182694487e-4, 9.2066793758506666e-4, 2.5753526935093970e-3], [-7.4432026333468555e-9, -6.9155556766534309e-8, -2.0499541498917590e-7, -4.4446683374699973e-7, -8.4657215362504600e-7, -1.5293669488485910e-6, -2.7445951109717038e-6, -5.0912902869478126e-6, -1.0255371721262393e-5, -2.4473141363040918e-5, -8.7589273466434280e-5], [1.1831750962838957e-10, 1.1073937796011338e-9, 3.3321240226931053e-9, 7.3946025733541605e-9, 1.4551581390118805e-8, 2.7463858822839706e-8, 5.2213712733083369e-8, 1.0454123182781585e-7, 2.3355960849166049e-7, 6.4703053386797289e-7, 2.9686331553851730e-6], [-1.7194569327441260e-12, -1.6243011801851389e-11, -4.9800791495571003e-11, -1.1374733262042050e-10, -2.3292341299002512e-10, -4.6320490811219881e-10, -9.4197783781419487e-10, -2.0569781796825595e-9, -5.1527647895331022e-9, -1.6751759579547772e-8, -9.9549188527004085e-8], [1.2290434605630256e-14, 1.2097474708646466e-13, 4.0086439390386573e-13, 1.0188905604763389e-12, 2.3721501134162794e-12, 5.4455088643444014e-12, 1.2932242006868313e-11, 3.3361590148305458e-11, 1.0039566420274578e-10, 4.0508624261604213e-10, 3.2500556677171172e-9], [8.0529046111338795e-16, 7.3294628900069505e-15, 2.0770977257781145e-14, 4.1617170278616956e-14, 6.9262402510323958e-14, 9.7552179859568687e-14, 9.7104137303904702e-14, -6.4412553055423171e-14, -1.0712816786920050e-12, -7.8883381946838341e-12, -1.0010468194238761e-10], [-6.4557232178433091e-17, -5.9735920803683832e-16, -1.7553006458014758e-15, -3.7498937157337853e-15, -6.9748647045402327e-15, -1.2120349134211149e-14, -2.0308096416490727e-14, -3.2714984479414727e-14, -4.4189408316613312e-14, 4.1606030436045499e-14, 2.7383912118771745e-12], [3.0286094687572939e-18, 2.8180321525242186e-17, 8.3781753005466179e-17, 1.8247142982186434e-16, 3.4961122574955152e-16, 6.3581942714027500e-16, 1.1467770332857675e-15, 2.1157872402081531e-15, 4.0437981970312762e-15, 6.8135125837332505e-15, -5.7471720636383980e-14], [-9.4864577705500856e-20, -8.8845692786282677e-19, -2.6770203104630191e-18, -5.9543186676970256e-18, -1.1757163501097191e-17, -2.2294107700593163e-17, -4.2624983907231229e-17, -8.5680650945937322e-17, -1.8924859004562336e-16, -4.6760656445805910e-16, 3.6500630813290483e-16], [1.0785959380469712e-21, 1.0452035201223459e-20, 3.3636334679979460e-20, 8.2154291064932001e-20, 1.8232548046398542e-19, 3.9623796639366534e-19, 8.8376342250099677e-19, 2.1136240436339772e-18, 5.7322544976084236e-18, 1.8987979898141907e-17, 4.4905783770107615e-17], [9.2457361960294989e-23, 8.4207761307734413e-22, 2.3913437055672208e-21, 4.8182830532890962e-21, 8.1390573807502066e-21, 1.1968888502352128e-20, 1.4200785162873378e-20, 5.2921878930479931e-21, -6.1457835338382742e-20, -4.7560763774859982e-19, -3.0560348321259661e-18], [-7.6783785291272270e-24, -7.0981818770442517e-23, -2.0816504557778374e-22, -4.4332285853302669e-22, -8.2092602129916374e-22, -1.4181404474020535e-21, -2.3597721313552144e-21, -3.7862865639510047e-21, -5.2963380530812039e-21, 5.9852110589957282e-22, 1.2320575219151372e-19]],
        [[8.3198078717197281e-4, 7.5628790095945299e-3, 2.1439481208002629e-2, 4.3366654391884588e-2, 7.4918712677179667e-2, 1.1870085690835744e-1, 1.7908382277237608e-1, 2.6381826191471103e-1, 3.8809674206396754e-1, 5.8729240547382100e-1, 9.7750437479043229e-1], [-2.5238283800654925e-5, -2.3096419047162141e-4, -6.6376172425643001e-4, -1.3714437910116364e-3, -2.4409039149839566e-3, -4.0248686649573451e-3, -6.4000461307288717e-3, -1.0105731741632418e-2, -1.6327882884271457e-2, -2.8252832513751216e-2, -5.8576815940920568e-2], [3.8279686775306744e-7, 3.5266647742414738e-6, 1.0274771343919859e-5, 2.1685134851752781e-5, 3.9762444235821632e-5, 6.8235687446298583e-5, 1.1435939064927242e-4, 1.9354975745137040e-4, 3.4346435627927123e-4, 6.7956571930398334e-4, 1.7550704417782112e-3], [-5.8046851809532999e-9, -5.3837646159234127e-8, -1.5901413220795915e-7, -3.4280862090707809e-7, -6.4759509039201337e-7, -1.1565991495069621e-6, -2.0430369284585804e-6, -3.7062813825694965e-6, -7.2237196049937819e-6, -1.6343183199565729e-5, -5.2578774902371740e-5], [8.7840046438082209e-11, 8.2020599307091131e-10, 2.4560492723717987e-9, 5.4089548405253668e-9, 1.0528141047124060e-8, 1.9571719987013998e-8, 3.6443845116872023e-8, 7.0877492739620525e-8, 1.5175998344593054e-7, 3.9270433373523246e-7, 1.5742546263215944e-6], [-1.3096833110027404e-12, -1.2315264444974076e-11, -3.7408303808032063e-11, -8.4229994697248349e-11, -1.6910744618102610e-10, -3.2764801703444432e-10, -6.4410863628947109e-10, -1.3452034661065437e-9, -3.1698127682196765e-9, -9.3986963038506201e-9, -4.7032767471380913e-8], [1.7824238301355736e-14, 1.6920543622973048e-13, 5.2390641377571893e-13, 1.2145164082493147e-12, 2.5372356332060370e-12, 5.1756551442859164e-12, 1.0860126735979437e-11, 2.4631762444685543e-11, 6.4578391318060402e-11, 2.2160548445738220e-10, 1.3959356942581636e-9], [-1.1872558717615180e-16, -1.1825726977198844e-15, -4.0024191474843319e-15, -1.0449239850911325e-14, -2.5049839440396603e-14, -5.9248224581808336e-14, -1.4497436665406670e-13, -3.8544089639470339e-13, -1.1963394466197820e-12, -4.9788851082840744e-12, -4.0737452412576127e-11], [-7.5700569128208904e-18, -6.8603950122657608e-17, -1.9251516877849362e-16, -3.7855142048696982e-16, -6.0701605838672441e-16, -7.8140410756664001e-16, -5.0747143580901514e-16, 1.8779309828558224e-15, 1.4671678218700659e-14, 9.6439869756017083e-14, 1.1447371165795242e-12], [5.9520225454818405e-19, 5.4946996075624648e-18, 1.6066459246927362e-17, 3.4043860328460363e-17, 6.2520269650170757e-17, 1.0647306920401117e-16, 1.7230852003627373e-16, 2.5793239594544807e-16, 2.6278293988766400e-16, -1.0090027416481224e-15, -2.9757394857761709e-14], [-2.9027115972266768e-20, -2.6932375772746047e-19, -7.9602736144323230e-19, -1.7175542481452387e-18, -3.2461282235050716e-18, -5.7895770132603166e-18, -1.0150275887906997e-17, -1.7913537453729108e-17, -3.1456373262162428e-17, -3.7878363459260248e-17, 6.5714234402444801e-16], [1.0728023853017328e-21, 9.9928337970720222e-21, 2.9776745498500871e-20, 6.5095286460751363e-20, 1.2544404417190463e-19, 2.3017955956591371e-19, 4.2116400846879889e-19, 7.9719353602172160e-19, 1.6110154560843537e-18, 3.3482261064351029e-18, -9.2816816451783809e-18], [-2.7818720225740454e-23, -2.6087441462669215e-22, -7.8809571996144833e-22, -1.7598783998173368e-21, -3.4939309322546399e-21, -6.6727743245586461e-21, -1.2878989360027175e-20, -2.6234801863732024e-20, -5.9253641373074167e-20, -1.5515459718092713e-19, -1.1405981687177584e-19], [2.3406990338047674e-25, 2.3008477094442216e-24, 7.5954588664557265e-24, 1.9152790275896595e-23, 4.3962395156133201e-23, 9.8643697312673906e-23, 2.2627468152935858e-22, 5.5385458135987480e-22, 1.5304573789108013e-21, 5.1741885011232237e-21, 1.5511070471764225e-20]],
        [[7.8436166036157599e-4, 7.1272641176592562e-3, 2.0188550132297006e-2, 4.0785181424725729e-2, 7.0332260507941089e-2, 1.1115650963409996e-1, 1.6712737585667497e-1, 2.4502673916243022e-1, 3.5794046410214325e-1, 5.3566926017837778e-1, 8.7265487506291615e-1], [-2.2432487894781946e-5, -2.0512933667733428e-4, -5.8858083020429694e-4, -1.2130645856487677e-3, -2.1512620926744749e-3, -3.5296334816639692e-3, -5.5742178891432227e-3, -8.7178099964963103e-3, -1.3889951344662059e-2, -2.3506584077517613e-2, -4.6693161771717444e-2], [3.2078033890524877e-7, 2.9519018497454210e-6, 8.5797831271183850e-6, 1.8039922333405032e-5, 3.2900408188800689e-5, 5.6039407068093997e-5, 9.2958583573236060e-5, 1.5508526147455396e-4, 2.6950067493991257e-4, 5.1576458930172839e-4, 1.2492036285678192e-3], [-4.5869833685750996e-9, -4.2478115266103729e-8, -1.2506501114146708e-7, -2.6827173677085290e-7, -5.0315180851388168e-7, -8.8970820391734172e-7, -1.5501925307960875e-6, -2.7588290420969263e-6, -5.2289057041982413e-6, -1.1316345891793813e-5, -3.3420049099773234e-5], [6.5574494689067563e-11, 6.1110842752868552e-10, 1.8225847864744104e-9, 3.9885185729332771e-9, 7.6930513464287152e-9, 1.4122457418631197e-8, 2.5846311219098084e-8, 4.9068801909839008e-8, 1.0143768160705944e-7, 2.4826262811225091e-7, 8.9401879801700546e-7], [-9.3549083388205508e-13, -8.7737339078518535e-12, -2.6508505186122643e-11, -5.9189114316506487e-11, -1.1742331556310771e-10, -2.2382321352957287e-10, -4.3035978147865156e-10, -8.7177487127425222e-10, -1.9661281227880364e-9, -5.4431618627740158e-9, -2.3907501953087994e-8], [1.3162401059414242e-14, 1.2427613941842419e-13, 3.8063324058689777e-13, 8.6798657460863999e-13, 1.7732998880936590e-12, 3.5147673446222820e-12, 7.1113690985189958e-12, 1.5396435447293734e-11, 3.7946448932922890e-11, 1.1902259679326500e-10, 6.3851283537212427e-10], [-1.7077365832464536e-16, -1.6274575044842551e-15, -5.0784411573602200e-15, -1.1911991065112453e-14, -2.5282749007057777e-14, -5.2624834694190233e-14, -1.1320627332438356e-13, -2.6463509214028430e-13, -7.1945154974194522e-13, -2.5770443533830235e-12, -1.6987134928379834e-11], [1.2411469992601984e-18, 1.2336327639050332e-17, 4.1617724947217264e-17, 1.0834206843909869e-16, 2.5943390611070172e-16, 6.1462150197850588e-16, 1.5116933727266033e-15, 4.0565670839043941e-15, 1.2765190379950568e-14, 5.4054771506796153e-14, 4.4735777280535419e-13], [5.2916298966703217e-20, 4.7509170532225162e-19, 1.3043082372994329e-18, 2.4541910151150787e-18, 3.5726002385118010e-18, 3.3886858371811394e-18, -2.6884505655110458e-18, -3.2859425511492970e-17, -1.7472408072603916e-16, -1.0309594005399745e-15, -1.1508214958802699e-14], [-4.3155556471037705e-21, -3.9730779556230510e-20, -1.1549162935433357e-19, -2.4228256654756534e-19, -4.3775921607225133e-19, -7.2530849528402530e-19, -1.1138549022418209e-18, -1.4583425165792241e-18, -4.5902732045144383e-19, 1.4238998279831062e-17, 2.8180987118708340e-16], [2.1388510878329012e-22, 1.9797502069787481e-21, 5.8222704766031977e-21, 1.2461395149092751e-20, 2.3269070348758922e-20, 4.0766676325465045e-20, 6.9530567119082629e-20, 1.1698975195836371e-19, 1.8383706911400855e-19, 8.0562250188689137e-20, -6.2408630745057669e-18], [-8.4454754605905218e-24, -7.8411240250240399e-23, -2.3208742377481796e-22, -5.0201654534864682e-22, -9.5275522151855146e-22, -1.7113275989530749e-21, -3.0388879451646393e-21, -5.5041429523478370e-21, -1.0328101368615043e-20, -1.7629136206531041e-20, 1.1012842418250606e-19], [2.6780668300416202e-25, 2.4949155814745695e-24, 7.4367949204185774e-24, 1.6266817497323906e-23, 3.1376996795700186e-23, 5.7668422863509257e-23, 1.0584514295646058e-22, 2.0169636076351105e-22, 4.1485113026494293e-22, 9.2500644629208489e-22, -7.7515131386267002e-22]],
        [[7.4190034039512658e-4, 6.7391156507055732e-3, 1.9075599533209965e-2, 3.8493888100776649e-2, 6.6275188003179758e-2, 1.0451425359193995e-1, 1.5666826761783645e-1, 2.2873558858406096e-1, 3.3213555797898958e-1, 4.9239496849376428e-1, 7.8814289418113161e-1], [-2.0069902249794520e-5, -1.8339920634028518e-4, -5.2548723870261372e-4, -1.0806205194571218e-3, -1.9102821879370506e-3, -3.1204956690107433e-3, -4.8985271265432902e-3, -7.5974111361740744e-3, -1.1960040289380987e-2, -1.9863498704296681e-2, -3.8092151546510872e-2], [2.7146564732834872e-7, 2.4955250276441259e-6, 7.2379584625479969e-6, 1.5167869224477344e-5, 2.7530494944399118e-5, 4.6584515189683026e-5, 7.6580805234485293e-5, 1.2617329706064213e-4, 2.1533758930091980e-4, 4.0065246634695856e-4, 9.2052582324608431e-4], [-3.6718375059960879e-9, -3.3956691212289676e-8, -9.9693987916036588e-8, -2.1289964104065878e-7, -3.9676150152473161e-7, -6.9543832601283446e-7, -1.1972185175804269e-6, -2.0954070986108496e-6, -3.8770932798618057e-6, -8.0812617488965704e-6, -2.2245175566534380e-5], [4.9663818087710798e-11, 4.6203727530592401e-10, 1.3731258319484799e-9, 2.9882310876475877e-9, 5.7178726323831283e-9, 1.0381636018732569e-8, 1.8716209288940701e-8, 3.4798564201134038e-8, 6.9804875292594445e-8, 1.6299900918823397e-7, 5.3756593141784689e-7], [-6.7156698355085403e-13, -6.2852577147785243e-12, -1.8908182976590764e-11, -4.1933097626997828e-11, -8.2385360216751979e-11, -1.5495023919607866e-10, -2.9254434257486063e-10, -5.7782306539975515e-10, -1.2566611452638080e-9, -3.2874316259682630e-9, -1.2989943064564300e-8], [9.0644926704980199e-15, 8.5347795225512466e-14, 2.5992509892599439e-13, 5.8750412709084847e-13, 1.1853421288188305e-12, 2.3098085642620469e-12, 4.5678443650622969e-12, 9.5866856279822977e-12, 2.2609273793008289e-11, 6.6276165249423852e-11, 3.1383141582753232e-10], [-1.2095202511594211e-16, -1.1460944578276324e-15, -3.5357783151202555e-15, -8.1527563819132910e-15, -1.6911370852405781e-14, -3.4188242995955542e-14, -7.0919484986019717e-14, -1.5838018361091151e-13, -4.0560796243612876e-13, -1.3339282352291294e-12, -7.5766484393040069e-12], [1.5134268293661372e-18, 1.4465497957998241e-17, 4.5408925260048667e-17, 1.0748101266443870e-16, 2.3095993068513247e-16, 4.8845002672690898e-16, 1.0718921759336225e-15, 2.5678092496976547e-15, 7.1916337520319369e-15, 2.6684568720336697e-14, 1.8252020795669126e-13], [-1.2601305557963736e-20, -1.2428372216023300e-19, -4.1378407770735047e-19, -1.0608966916097842e-18, -2.5049221393102126e-18, -5.8722185601162508e-18, -1.4363755340506331e-17, -3.8559734786536464e-17, -1.2214785443968910e-16, -5.2345226574247708e-16, -4.3712693789310275e-15], [-2.7047654897357928e-22, -2.3760452202615178e-21, -6.1803213266422921e-21, -1.0282054781676245e-20, -1.0323866529265864e-20, 7.3608918002935280e-21, 8.8499251477228040e-20, 4.0659886862903427e-19, 1.7752229980807345e-18, 9.6900557979154633e-18, 1.0324546626213952e-16], [2.5279651380973768e-23, 2.3189967448494491e-22, 6.6881826753607839e-22, 1.3837726902923833e-21, 2.4415190341767919e-21, 3.8727136568132902e-21, 5.4033022724273948e-21, 5.0040397598524295e-21, -1.0384153105348724e-20, -1.5042945862568496e-19, -2.3664869870667254e-18], [-1.2676175916325441e-24, -1.1706629488164666e-23, -3.4263740897109757e-23, -7.2758499929347431e-23, -1.3421816990598562e-22, -2.3073637924377294e-22, -3.8127641767161016e-22, -6.0243816283192830e-22, -7.8031666733419643e-22, 9.6847204972870549e-22, 5.1022059508746435e-20], [5.1344806322698884e-26, 4.7554568268318747e-25, 1.4004538618542080e-24, 3.0048697674263828e-24, 5.6355865123353339e-24, 9.9515930982989068e-24, 1.7234169141883034e-23, 2.9989433878939817e-23, 5.1982810102963248e-23, 6.3942356028866688e-23, -9.6874273585350174e-22]],
        [[7.0380163890113663e-4, 6.3910739218607307e-3, 1.8078986337969221e-2, 3.6446434468668621e-2, 6.2660811803056852e-2, 9.8621361144874624e-2, 1.4744168837284719e-1, 2.1447667652735855e-1, 3.0980310192047064e-1, 4.5559442367112335e-1, 7.1856915937861588e-1], [-1.8061866037155906e-5, -1.6494813422593942e-4, -4.7202208630553950e-4, -9.6874306908863874e-4, -1.7076434446107499e-3, -2.7785942331236943e-3, -4.3386654222844843e-3, -6.6799430244212517e-3, -1.0406189142673264e-2, -1.7006335908611668e-2, -3.1666896976756550e-2], [2.3176345623516417e-7, 2.1285848808463830e-6, 6.1619839467790854e-6, 1.2874553243134149e-5, 2.3268499190643604e-5, 3.9142563670029043e-5, 6.3835464780069400e-5, 1.0402445378050878e-4, 1.7477031449527560e-4, 3.1740451852497856e-4, 6.9777024121863660e-4], [-2.9739058202437009e-9, -2.7468468702705250e-8, -8.0441232589412747e-8, -1.7110221825575658e-7, -3.1705854667045290e-7, -5.5140832809830166e-7, -9.3922103378962884e-7, -1.6199367391182512e-6, -2.9352395492147100e-6, -5.9240046929841980e-6, -1.5375148666130821e-5], [3.8159998007356811e-11, 3.5446782307914611e-10, 1.0501124022003327e-9, 2.2739351037519389e-9, 4.3202567733043495e-9, 7.7677714770117932e-9, 1.3818876486848829e-8, 2.5226668180863993e-8, 4.9296804179515366e-8, 1.1056486421229943e-7, 3.3878627301373725e-7], [-4.8964168564761369e-13, -4.5741276136257896e-12, -1.3708259244077887e-11, -3.0219722840349444e-11, -5.8866788127469655e-11, -1.0942362623519070e-10, -2.0331536696624394e-10, -3.9283973384511352e-10, -8.2792099093389611e-10, -2.0635506037148796e-9, -7.4650023364660759e-9], [6.2814199184433757e-15, 5.9013464395284936e-14, 1.7891390420100888e-13, 4.0153539452952061e-13, 8.0197230186816803e-13, 1.5412131176431020e-12, 2.9909859618109742e-12, 6.1168540813310914e-12, 1.3903592572108097e-11, 3.8511618897081992e-11, 1.6448366069964816e-10], [-8.0465782935469632e-17, -7.6029990387171064e-16, -2.3320084341735751e-15, -5.3287990898267676e-15, -1.0913921939510824e-14, -2.1687846551344210e-14, -4.3967951395536284e-14, -9.5190996399874216e-14, -2.3339684768665320e-13, -7.1856470177201364e-13, -3.6238407686855247e-12], [1.0219309363899545e-18, 9.7140011586672317e-18, 3.0160095781302525e-17, 7.0224411583755252e-17, 1.4762842825499707e-16, 3.0367078038128868e-16, 6.4383727291027893e-16, 1.4772515448079389e-15, 3.9109505946267964e-15, 1.3394146807262216e-14, 7.9808841826394346e-14], [-1.2390418448295145e-20, -1.1870224857022179e-19, -3.7436948508441580e-19, -8.9252921666361041e-19, -1.9371310587968492e-18, -4.1506782712195359e-18, -9.2611144604677559e-18, -2.2649634930803579e-17, -6.5062265436696397e-17, -2.4878441629155503e-16, -1.7555935488934422e-15], [1.1548304693504364e-22, 1.1311073617990564e-21, 3.7205362307987086e-21, 9.4019738132640641e-21, 2.1892090764997533e-20, 5.0759358081444587e-20, 1.2337349636145771e-19, 3.3099723548600141e-19, 1.0544198775962232e-18, 4.5683506211715680e-18, 3.8494905722717095e-17], [8.4095955970286158e-25, 6.8064323920088305e-24, 1.3805915233260601e-23, 6.7555500465875662e-24, -5.6640778157360031e-23, -2.9997609036081128e-22, -1.1187647186752581e-21, -3.9740684261162236e-21, -1.5610252335762030e-20, -8.1102311983447453e-20, -8.3746401723066757e-19], [-1.2114158162593558e-25, -1.1051811296182037e-24, -3.1484059955333443e-24, -6.3680981111070792e-24, -1.0776820632118626e-23, -1.5678899665136581e-23, -1.7096085576700168e-23, 4.6319025123664704e-24, 1.5939954699835409e-22, 1.3067957028889569e-21, 1.7902680457780781e-20], [6.2113043376916303e-27, 5.7222839598881411e-26, 1.6660439452027372e-25, 3.5064382651089339e-25, 6.3760460255951997e-25, 1.0701807904988368e-24, 1.6914125567968909e-24, 2.4039717361685130e-24, 1.8188852666380444e-24, -1.5169062017535862e-23, -3.6893098747406014e-22]],
        [[6.6942587350378551e-4, 6.0772262996094187e-3, 1.7181370047924509e-2, 3.4605851186880470e-2, 5.9420399173849079e-2, 9.3357749084547853e-2, 1.3924181513628762e-1, 2.0189190851835752e-1, 2.9028605048542421e-1, 4.2391522330348775e-1, 6.6029162319679752e-1], [-1.6340820936847105e-5, -1.4914801267531461e-4, -4.2632118689201836e-4, -8.7338380599210276e-4, -1.5356223142114965e-3, -2.4899627069823650e-3, -3.8695911997111183e-3, -5.9191921380639957e-3, -9.1366601291583441e-3, -1.4724219426113960e-2, -2.6740698118686315e-2], [1.9944137149469220e-7, 1.8302041563372926e-6, 5.2891519629520578e-6, 1.1021247068407162e-5, 1.9842814274035085e-5, 3.3205140105658106e-5, 5.3768819462669906e-5, 8.6771272293492722e-5, 1.4378672020386144e-4, 2.5571461650111995e-4, 5.4147660677642449e-4], [-2.4342020623886177e-9, -2.2458543968052924e-8, -6.5619839936495281e-8, -1.3907732685448982e-7, -2.5640241658927506e-7, -4.4281037225559345e-7, -7.4712954320225110e-7, -1.2720069594540473e-6, -2.2628203691676064e-6, -4.4409800240476936e-6, -1.0964444961951107e-5], [2.9709675333449340e-11, 2.7559006853923991e-10, 8.1411207666369776e-10, 1.7550190819035956e-9, 3.3131483041861141e-9, 5.9051396655922491e-9, 1.0381527168756604e-8, 1.8646741205111484e-8, 3.5610766665207980e-8, 7.7126218570077511e-8, 2.2202075203594927e-7], [-3.6260865817515545e-13, -3.3817735951466971e-12, -1.0100253152364568e-11, -2.2146567739144613e-11, -4.2811335738368694e-11, -7.8748407072999386e-11, -1.4425334200771589e-10, -2.7334793857541456e-10, -5.6041800851808594e-10, -1.3394450223448397e-9, -4.4957303194836672e-9], [4.4255716046468837e-15, 4.1496992419547126e-14, 1.2530598618414318e-13, 2.7946218947181987e-13, 5.5318376152038569e-13, 1.0501394204013328e-12, 2.0044030241439111e-12, 4.0070449618553981e-12, 8.8194085564376136e-12, 2.3261913428527437e-11, 9.1034424589367556e-11], [-5.4004755571231520e-17, -5.0912206787570874e-16, -1.5543473028338997e-15, -3.5259925981965755e-15, -7.1470715237970436e-15, -1.4002564696991115e-14, -2.7848879213434449e-14, -5.8736014905558370e-14, -1.3878638713956968e-13, -4.0397413566600015e-13, -1.8433385481458482e-12], [6.5833363434539587e-19, 6.2401144352016602e-18, 1.9262678321413598e-17, 4.4449884216951490e-17, 9.2271050165377954e-17, 1.8659537233609923e-16, 3.8674082474102481e-16, 8.6065813629497993e-16, 2.1834952074987751e-15, 7.0146174203935454e-15, 3.7323357659312259e-14], [-7.9777285921746677e-21, -7.6045926600612704e-20, -2.3745330316023688e-19, -5.5770689416553113e-19, -1.1864683969461178e-18, -2.4784819541215360e-18, -5.3575714622691675e-18, -1.2589752364226111e-17, -3.4316290101701987e-17, -1.2173606760615422e-16, -7.5556587634342861e-16], [9.3731100853266851e-23, 8.9970182465050263e-22, 2.8487908915148966e-21, 6.8336856648807604e-21, 1.4959815785438050e-20, 3.2421302452765042e-20, 7.3402424257433607e-20, 1.8282782026979823e-19, 5.3706613122416946e-19, 2.1085512796691281e-18, 1.5286276035972436e-17], [-9.3771085372301075e-25, -9.1421296959446622e-24, -2.9827277969671698e-23, -7.4638755165405615e-23, -1.7216586424016510e-22, -3.9636819408470620e-22, -9.6028841334691320e-22, -2.5807185720325041e-21, -8.2795497579507142e-21, -3.6290133340034444e-20, -3.0874350200585348e-19], [9.3887389970526687e-28, 1.5473594698421890e-26, 8.8771433306642590e-26, 3.4982124180197418e-25, 1.1433011248382813e-24, 3.4401267301104707e-24, 1.0273330722833390e-23, 3.2690444032873948e-23, 1.2131736974189921e-22, 6.1292888175752409e-22, 6.2093102551940202e-21], [4.6964979262477314e-28, 4.2415571759536515e-27, 1.1798527694928668e-26, 2.2777851513389074e-26, 3.4997405542875699e-26, 3.9322349542551775e-26, -4.6041303261149196e-28, -2.3958105756735491e-25, -1.4869989747314962e-24, -9.8180901384830176e-24, -1.2361528910281649e-22]],
        [[6.3825262600323280e-4, 5.7927682152720212e-3, 1.6368694151672778e-2, 3.2942284781973812e-2, 5.6498749754702174e-2, 8.8627698105601637e-2, 1.3190625103083629e-1, 1.9070268425017980e-1, 2.7308335592035852e-1, 3.9635732374445318e-1, 6.1076395209283401e-1], [-1.4854566693520060e-5, -1.3551424028967366e-4, -3.8695064451723080e-4, -7.9144362680295766e-4, -1.3883466413932278e-3, -2.2440817027458042e-3, -3.4726825918985299e-3, -5.2813904872688776e-3, -8.0860787634265144e-3, -1.2872547489573732e-2, -2.2880929510914474e-2], [1.7286113887299062e-7, 1.5850892559266098e-6, 4.5736941473777809e-6, 9.5072794512528633e-6, 1.7057956193033479e-5, 2.8410433735397998e-5, 4.5712482498424083e-5, 7.3132388217368640e-5, 1.1971558930071202e-4, 2.0903168547008529e-4, 4.2859187535383556e-4], [-2.0115681537483452e-9, -1.8540545562105797e-8, -5.4060326366355024e-8, -1.1420694968436573e-7, -2.0958301082261713e-7, -3.5968064050308282e-7, -6.0173396178704697e-7, -1.0126776677667772e-6, -1.7724069636145149e-6, -3.3943743870106287e-6, -8.0281264534419673e-6], [2.3408421328079326e-11, 2.1686591010850298e-10, 6.3898431893087491e-10, 1.3719200344822615e-9, 2.5750469324719708e-9, 4.5536144408583305e-9, 7.9208946056673459e-9, 1.4022734271795453e-8, 2.6240746341203803e-8, 5.5119764990351076e-8, 1.5037805807958222e-7], [-2.7240145063267289e-13, -2.5366467158116021e-12, -7.5526899643001220e-12, -1.6480295240969933e-11, -3.1638373666219729e-11, -5.7649478471921027e-11, -1.0426628189983989e-10, -1.9417536282255656e-10, -3.8849808010322374e-10, -8.9506575389724973e-10, -2.8167916118395986e-9], [3.1699024362826947e-15, 2.9670706590475767e-14, 8.9271401217478735e-14, 1.9797049138510693e-13, 3.8872502242653008e-13, 7.2985052757361634e-13, 1.3725021642604582e-12, 2.6887791669419292e-12, 5.7517665800464895e-12, 1.4534573834162622e-11, 5.2762435853392742e-11], [-3.6887202384202896e-17, -3.4704780318726763e-16, -1.0551564962256666e-15, -2.3781006624274846e-15, -4.7760156011112180e-15, -9.2399167160725214e-15, -1.8066687756381307e-14, -3.7231736322217667e-14, -8.5155277167163073e-14, -2.3601974965997914e-13, -9.8831251067581051e-13], [4.2919847437927698e-19, 4.0588662805297869e-18, 1.2470336378830601e-17, 2.8564108919170383e-17, 5.8675191132013278e-17, 1.1696966970356732e-16, 2.3780501469559507e-16, 5.1553043255392744e-16, 1.2606957031759510e-15, 3.8325479933142230e-15, 1.8512316927693855e-14], [-4.9905016917691527e-21, -4.7438834386679460e-20, -1.4728992295510392e-19, -3.4290402829535594e-19, -7.2050799010135220e-19, -1.4801706753631223e-18, -3.1292171756801513e-18, -7.1368210865957378e-18, -1.8661713665947512e-17, -6.2229474822595644e-17, -3.4674924845962167e-16], [5.7806699704016028e-23, 5.5242891041111084e-22, 1.7338273746730512e-21, 4.1042737290310334e-21, 8.8255781111812226e-21, 1.8693718565344967e-20, 4.1116848684635462e-20, 9.8702952889645007e-20, 2.7608311951809885e-19, 1.0101385979099780e-18, 6.4942510387218626e-18], [-6.5682367802105211e-25, -6.3158407459110101e-24, -2.0070754128366607e-23, -4.8417450013732716e-23, -1.0683000683416435e-22, -2.3395197024054206e-22, -5.3678671666223963e-22, -1.3594398298517353e-21, -4.0750073344331119e-21, -1.6380183790823177e-20, -1.2159415480278922e-19], [6.7929116295246841e-27, 6.6055542591318063e-26, 2.1454701456122716e-25, 5.3405925543868136e-25, 1.2261993900979403e-24, 2.8156134433147159e-24, 6.8252972962170970e-24, 1.8427376819376425e-23, 5.9652283625505907e-23, 2.6472461886546818e-22, 2.2747096900998149e-21], [-3.7853217605243847e-29, -3.9362222235270134e-28, -1.4345999033519258e-27, -4.1043798992564692e-27, -1.0861628588761806e-26, -2.8508306170537051e-26, -7.8056096155393645e-26, -2.3561432685265856e-25, -8.4942074266509360e-25, -4.2344649219852620e-24, -4.2445485477756911e-23]],
        [[6.0985417952311762e-4, 5.5337551534659903e-3, 1.5629443688398867e-2, 3.1431363787340562e-2, 5.3851020619669652e-2, 8.4353970480282977e-2, 1.2530514299138481e-1, 1.8068899178110698e-1, 2.5780624901253174e-1, 3.7216525347023477e-1, 5.6815206513199726e-1], [-1.3562254595075799e-5, -1.2366810463081472e-4, -3.5279295383097851e-4, -7.2051764069810141e-4, -1.2612875718806917e-3, -2.0329061722480342e-3, -3.1338591310391101e-3, -4.7413997263855720e-3, -7.2068376055686682e-3, -1.1349478990374527e-2, -1.9800518550689975e-2], [1.5080223754866732e-7, 1.3818645457545625e-6, 3.9816794107879227e-6, 8.2584019272552527e-6, 1.4770809547050843e-5, 2.4496223957324418e-5, 3.9188627133351595e-5, 6.2208746486673484e-5, 1.0073167053123657e-4, 1.7305574896016166e-4, 3.4503133838269554e-4], [-1.6768093157782939e-9, -1.5440922527045792e-8, -4.4937889935059371e-8, -9.4655839822392835e-8, -1.7297943746037802e-7, -2.9517593891811888e-7, -4.9005026463483136e-7, -8.1619951122444638e-7, -1.4079503386564415e-6, -2.6387371853721649e-6, -6.0122983221660756e-6], [1.8644879040901660e-11, 1.7253651158683137e-10, 5.0717643013890401e-10, 1.0849227346314242e-9, 2.0257444696685732e-9, 3.5568271657218742e-9, 6.1280345654334397e-9, 1.0708809921134771e-8, 1.9679254242288301e-8, 4.0235207272130434e-8, 1.0476651560522136e-7], [-2.0731725790092590e-13, -1.9279189666034909e-12, -5.7240766769808231e-12, -1.2435126312227714e-11, -2.3723285640859295e-11, -4.2859249934304304e-11, -7.6630521307585283e-11, -1.4050315801059069e-10, -2.7506157994183720e-10, -6.1350251316577883e-10, -1.8255951651938849e-9], [2.3052141454991714e-15, 2.1542518477464529e-14, 6.4602862376330382e-14, 1.4252844063425457e-13, 2.7782092970591170e-13, 5.1644766975386406e-13, 9.5825768772596137e-13, 1.8434481503604104e-12, 3.8446003657690044e-12, 9.3546260226056799e-12, 3.1811668067157614e-11], [-2.5632237204155377e-17, -2.4071524937931982e-16, -7.2911752579859777e-16, -1.6336249745683729e-15, -3.2535286142024031e-15, -6.2231129693316844e-15, -1.1982916031840148e-14, -2.4186638219693604e-14, -5.3736859509529767e-14, -1.4263837709301305e-13, -5.5432994767427131e-13], [2.8500814968841423e-19, 2.6897157635226037e-18, 8.2288513363232502e-18, 1.8724035328544268e-17, 3.8101405956044983e-17, 7.4987047865844022e-17, 1.4984438498833328e-16, 3.1733530647507796e-16, 7.5109036098544253e-16, 2.1749317929218117e-15, 9.6593947878436930e-15], [-3.1688215414477363e-21, -3.0052451924997881e-20, -9.2865321941560668e-20, -2.1459616371951162e-19, -4.4617594388336375e-19, -9.0353996784146529e-19, -1.8737208001703007e-18, -4.1634323747069101e-18, -1.0497980215226540e-17, -3.3162814534895487e-17, -1.6831780845218644e-16], [3.5217279301960726e-23, 3.3564318278196515e-22, 1.0476242084965582e-21, 2.4586716815875212e-21, 5.2233564025173966e-21, 1.0884566860774993e-20, 2.3425906839513600e-20, 5.4617841513239669e-20, 1.4671978846735388e-19, 5.0564013786180360e-19, 2.9329500568584234e-18], [-3.9050188304209963e-25, -3.7404779727692643e-24, -1.1794752558806328e-23, -2.8120365761114610e-23, -6.1061264313058252e-23, -1.3097452408537205e-22, -2.9264123236351840e-22, -7.1612085750892480e-22, -2.0499286415273174e-21, -7.7084937811823886e-21, -5.1104574555520835e-20], [4.2814263469715403e-27, 4.1239147717620984e-26, 1.3150448636352587e-25, 3.1893877421636322e-25, 7.0899183766379773e-25, 1.5679783640128088e-24, 3.6427434560753944e-24, 9.3685185339863930e-24, 2.8606604550214831e-23, 1.1745534430976402e-22, 8.9033376350792984e-22], [-4.4577684545926640e-29, -4.3267788056208090e-28, -1.4035103316050905e-27, -3.4865961594543248e-27, -7.9971337738855230e-27, -1.8376542960727228e-26, -4.4702606304989139e-26, -1.2151855677016784e-25, -3.9743071602189147e-25, -1.7862616985137993e-24, -1.5500169703728957e-23]],
        [[5.8387575316851358e-4, 5.2969184091630205e-3, 1.4954095543485426e-2, 3.0052995360846850e-2, 5.1440405300199267e-2, 8.0473553795120728e-2, 1.1933341642519745e-1, 1.7167477121239433e-1, 2.4414844693393884e-1, 3.5075762602013833e-1, 5.3110125248630798e-1], [-1.2431548867794650e-5, -1.1331018125188504e-4, -3.2296677096971418e-4, -6.5871657306159442e-4, -1.1509069560292172e-3, -1.8501984149525212e-3, -2.8423145906665206e-3, -4.2801935468909376e-3, -6.4636009783426259e-3, -1.0081607890860926e-2, -1.7302890941653731e-2], [1.3234271710520140e-7, 1.2119496831518212e-6, 3.4875909026815814e-6, 7.2190395402518836e-6, 1.2874964861824570e-5, 2.1269311551763847e-5, 3.3849496957032762e-5, 5.3356869706200360e-5, 8.5558884629168177e-5, 1.4488468692511377e-4, 2.8185777527084390e-4], [-1.4088827512137509e-9, -1.2962842511211951e-8, -3.7661119959466914e-8, -7.9115258389914085e-8, -1.4402964490231257e-7, -2.4450545964588833e-7, -4.0311809537266826e-7, -6.6514645042188731e-7, -1.1325455831026572e-6, -2.0821651399817635e-6, -4.5913602384869933e-6], [1.4998563199649083e-11, 1.3864873129116942e-10, 4.0668759498287624e-10, 8.6704388786760418e-10, 1.6112306970835678e-9, 2.8107595136405625e-9, 4.8007862277291903e-9, 8.2917120685680204e-9, 1.4991540659983515e-8, 2.9923187618927866e-8, 7.4791581742224409e-8], [-1.5967041801769477e-13, -1.4829672313513185e-12, -4.3916590884454496e-12, -9.5021506354528975e-12, -1.8024514041490845e-11, -3.2311626286477928e-11, -5.7173192302635878e-11, -1.0336443792222491e-10, -1.9844348394607342e-10, -4.3003176823189339e-10, -1.2183275559522152e-9], [1.6998056255104963e-15, 1.5861607707046758e-14, 4.7423795514255629e-14, 1.0413644228388993e-13, 2.0163661478827377e-13, 3.7144450795590898e-13, 6.8088303439356982e-13, 1.2885405177328720e-12, 2.6268024763749235e-12, 6.1800675581277584e-12, 1.9846110963441386e-11], [-1.8095642829968307e-17, -1.6965349428631397e-16, -5.1211082440278880e-16, -1.1412571763708917e-15, -2.2556680814036725e-15, -4.2700113921270910e-15, -8.1087247215122349e-15, -1.6062938250420941e-14, -3.4771063567998751e-14, -8.8814912987087178e-14, -3.2328589560177140e-13], [1.9264085004150344e-19, 1.8145880266300668e-18, 5.5300779051692574e-18, 1.2507311998047157e-17, 2.5233686576995779e-17, 4.9086705167392091e-17, 9.6567814548011742e-17, 2.0024042052409177e-16, 4.6026550354900330e-16, 1.2763756213708283e-15, 5.2662087210481719e-15], [-2.0507842467677966e-21, -1.9408437684078491e-20, -5.9716730123522118e-20, -1.3706992167980631e-19, -2.8228268095370664e-19, -5.6428315563018683e-19, -1.1500347354340494e-18, -2.4961895637932851e-18, -6.0925380550263079e-18, -1.8343016158640817e-17, -8.5784579257409850e-17], [2.1830993602646297e-23, 2.0758009672222082e-22, 6.4482911942655596e-22, 1.5021246135905945e-21, 3.1577338152682029e-21, 6.4866489862243578e-21, 1.3695629815854371e-20, 3.1117029168344659e-20, 8.0646363239564018e-20, 2.6360962504684490e-19, 1.3973967457927412e-18], [-2.3233863168774745e-25, -2.2196248350749821e-24, -6.9614572240825819e-24, -1.6458415583206326e-23, -3.5318203380509631e-23, -7.4557278793754013e-23, -1.6308489429629614e-22, -3.8787552414795954e-22, -1.0674702592445543e-21, -3.7882986731458509e-21, -2.2762905397662850e-20], [2.4695704437748969e-27, 2.3705305418896102e-26, 7.5071497267697462e-26, 1.8015801094810223e-25, 3.9471263942574496e-25, 8.5644329513778608e-25, 1.9411557768925104e-24, 4.8335705203984509e-24, 1.4127346624809039e-23, 5.4437396450796514e-23, 3.7078893679464148e-22], [-2.6006657437608440e-29, -2.5179806188570144e-28, -8.0649758117345300e-28, -1.9656441605844562e-27, -4.3992800531912776e-27, -9.8168104934003341e-27, -2.3069476485887027e-26, -6.0172563086825791e-26, -1.8684593144216033e-25, -7.8193346683460597e-25, -6.0378995589336476e-24]],
        [[5.6002058793695662e-4, 5.0795262707508130e-3, 1.4334705528902776e-2, 2.8790465627140534e-2, 4.9236410290934677e-2, 7.6934529405989285e-2, 1.1390513260910714e-1, 1.6351745839096771e-1, 2.3186537193973003e-1, 3.3167971042235838e-1, 4.9858909767903497e-1], [-1.1436582999340366e-5, -1.0420121506910166e-4, -2.9676945485448788e-4, -6.0453956505664979e-4, -1.0544081946740630e-3, -1.6910618144405355e-3, -2.5896439638766771e-3, -3.8831571803537669e-3, -5.8296953002665566e-3, -9.0149403915317602e-3, -1.5249768447027519e-2], [1.1677734133189017e-7, 1.0687899464561813e-6, 3.0719887882262703e-6, 6.3470332583707047e-6, 1.1290187834840007e-5, 1.8585218382035484e-5, 2.9437900233420391e-5, 4.6107950293843868e-5, 7.3286810811024370e-5, 1.2251148880855926e-4, 2.3321352068317807e-4], [-1.1923970166025726e-9, -1.0962558823214999e-8, -3.1799482597063907e-8, -6.6637212039345059e-8, -1.2089088646104433e-7, -2.0425648510201758e-7, -3.3463672313290736e-7, -5.4747798802865042e-7, -9.2131001059422897e-7, -1.6649100535579316e-6, -3.5665162011056431e-6], [1.2175398317685152e-11, 1.1244276422169435e-10, 3.2917017708915742e-10, 6.9962104302834170e-10, 1.2944520182539256e-9, 2.2448330091395833e-9, 3.8039987764335314e-9, 6.5006608505620137e-9, 1.1582058575412787e-8, 2.2625841163046480e-8, 5.4542454380258666e-8], [-1.2432128068116532e-13, -1.1533233644513204e-12, -3.4073826562193771e-12, -7.3452893486760531e-12, -1.3860482593157943e-11, -2.4671310857697986e-11, -4.3242135994315872e-11, -7.7187745290706842e-11, -1.4560145802922731e-10, -3.0748128838952351e-10, -8.3411350517336693e-10], [1.2694271197381504e-15, 1.1829616526874472e-14, 3.5271289337155930e-14, 7.7117857039139981e-14, 1.4841259071873920e-13, 2.7114425732391183e-13, 4.9155702572040420e-13, 9.1651420639177008e-13, 1.8303986665956195e-12, 4.1786178027202449e-12, 1.2756032842769078e-11], [-1.2961941758980292e-17, -1.2133615810140489e-16, -3.6510834497566477e-16, -8.0965684958003209e-16, -1.5891435812496643e-15, -2.9799473687735819e-15, -5.5877977081922247e-15, -1.0882534321785300e-14, -2.3010478840357144e-14, -5.6786696837916554e-14, -1.9507701613465990e-13], [1.3235255486204195e-19, 1.2445426472473354e-18, 3.7793938793893904e-18, 8.5005496863783705e-18, 1.7015922821257717e-17, 3.2750411197055488e-17, 6.3519552039247452e-17, 1.2921736406850342e-16, 2.8927147692012680e-16, 7.7172142756997702e-16, 2.9832975851986166e-15], [-1.3514324996650236e-21, -1.2765243410989271e-20, -3.9122116201124154e-20, -8.9246836962907009e-20, -1.8219972092776721e-19, -3.5993558023097045e-19, -7.2206129541085473e-19, -1.5343047392494414e-18, -3.6365160897348529e-18, -1.0487560461951651e-17, -4.5623335622090176e-17], [1.3799227244093384e-23, 1.3093231675176129e-22, 4.0496833474043808e-22, 9.3699517170392119e-22, 1.9509169915120599e-21, 3.9557778252687324e-21, 8.2080502581352094e-21, 1.8218049542188488e-20, 4.5715670729206159e-20, 1.4252407239258230e-19, 6.9771397683842717e-19], [-1.4089802543831879e-25, -1.3429341076887230e-24, -4.1918984524039982e-24, -9.8372542745367967e-24, -2.0889264976442832e-23, -4.3474407237017275e-23, -9.3304371077255199e-23, -2.1631639446732761e-22, -5.7470244776121974e-22, -1.9368730066364660e-21, -1.0670076158542360e-20], [1.4384363558011451e-27, 1.3772602806437674e-26, 4.3387349787155649e-26, 1.0327006283852023e-25, 2.2365482927265917e-25, 4.7776335205533793e-25, 1.0605889462314432e-24, 2.5684181875957528e-24, 7.2246101780116383e-24, 2.6321518603892518e-23, 1.6317610701462881e-22], [-1.4704420098826706e-29, -1.4163751034210385e-28, -4.5003810302764776e-28, -1.0861628588761806e-27, -2.3976300270042338e-27, -5.2555885658086859e-27, -1.2061683240829271e-26, -3.0502659233350800e-26, -9.0821274282057510e-26, -3.5765477145883762e-25, -2.4948699807360371e-24]],
        [[5.3803854910872987e-4, 4.8792780761415333e-3, 1.3764594113886953e-2, 2.7629757905731732e-2, 4.7213556945829684e-2, 7.3693733430831075e-2, 1.0894932119822559e-1, 1.5610037884984556e-1, 2.2075935305438203e-1, 3.1457071180670609e-1, 4.6982944058212954e-1], [-1.0556466410454750e-5, -9.6148172143966015e-5, -2.7363528214105910e-4, -5.5678213588754837e-4, -9.6955724504631243e-4, -1.5516091200417488e-3, -2.3692304489513085e-3, -3.5389143846809868e-3, -5.2846801975970751e-3, -8.1090443996320860e-3, -1.3541585789110409e-2], [1.0356040776228760e-7, 9.4731954833942551e-7, 2.7198865078366206e-6, 5.6100083812024655e-6, 9.9552047360077927e-6, 1.6334434078145864e-5, 2.5760843934149431e-5, 4.0114941149979122e-5, 6.3254046554473454e-5, 1.0451799644273597e-4, 1.9515012241105153e-4], [-1.0159420433782370e-9, -9.3336597738152561e-9, -2.7035192821728379e-8, -5.6525150518690145e-8, -1.0221789568608365e-7, -1.7195937637058373e-7, -2.8009984444245730e-7, -4.5471812215409923e-7, -7.5710814200918362e-7, -1.3471391993980546e-6, -2.8123419863922633e-6], [9.9665331356403684e-12, 9.1961793595437796e-11, 2.6872505481458288e-10, 5.6953437928285376e-10, 1.0495513126612512e-9, 1.8102878238870455e-9, 3.0455494026990154e-9, 5.1544029403472172e-9, 9.0620722296849449e-9, 1.7363364055192525e-8, 4.0529144182467883e-8], [-9.7773080059874906e-14, -9.0607239670136714e-13, -2.6710797130612528e-12, -5.7384970443666855e-12, -1.0776566573899896e-11, -1.9057652304113977e-11, -3.3114517370458342e-11, -5.8427118641173796e-11, -1.0846687354056292e-10, -2.2379751954906709e-10, -5.8407246917658181e-10], [9.5916755142505373e-16, 8.9272637681988896e-15, 2.6550061876834734e-14, 5.7819772650359296e-14, 1.1065146193023159e-13, 2.0062782643627135e-13, 3.6005696038598440e-13, 6.6229362200025804e-13, 1.2982750917445765e-12, 2.8845406682849924e-12, 8.4171688331318026e-12], [-9.4095674458016040e-18, -8.7957693706122130e-17, -2.6390293852256868e-16, -5.8257869297482652e-16, -1.1361453518633488e-15, -2.1120925118564787e-15, -3.9149299151661891e-15, -7.5073502138416520e-15, -1.5539474481753517e-14, -3.7179030771066402e-14, -1.2130126807630818e-13], [9.2309168442686073e-20, 8.6662117809367818e-19, 2.6231487127171931e-18, 5.8699285120654549e-18, 1.1665695446331112e-17, 2.2234875605188103e-17, 4.2567365402218666e-17, 8.5098671101922820e-17, 1.8599699580281170e-16, 4.7920292574435063e-16, 1.7480934410176770e-15], [-9.0556577359439866e-22, -8.5385621688921158e-21, -2.6073635047453095e-20, -5.9144043469781379e-20, -1.1978084131374748e-19, -2.3407576974895124e-19, -4.6283856909507201e-19, -9.6462580074068948e-19, -2.2262581736782897e-18, -6.1764773800631571e-18, -2.5192075217753107e-17], [8.8837234122878082e-24, 8.4127902829578341e-23, 2.5916725689926511e-22, 5.9592156850159908e-22, 1.2298835437929856e-21, 2.4642124060123687e-21, 5.0324822702903057e-21, 1.0934399226471298e-20, 2.6646802084944600e-20, 7.9609011957442732e-20, 3.6304732302733819e-19], [-8.7150321945350617e-26, -8.2888532336070793e-25, -2.5760708145428868e-24, -6.0043557000426511e-24, -1.2628156368259427e-23, -2.5941751610482675e-23, -5.4718549407472073e-23, -1.2394548497849756e-22, -3.1894404606109840e-22, -1.0260854468394096e-21, -5.2319369516716793e-21], [8.5500240195569473e-28, 8.1671438640620602e-27, 2.5606382723068406e-26, 6.0499926275690632e-26, 1.2966574315766790e-25, 2.7310257479057149e-25, 5.9496340249428837e-25, 1.4049741193619356e-24, 3.8175508066318070e-24, 1.3225287335132433e-23, 7.5398346457335344e-23], [-8.4448176201491518e-30, -8.0981502301594493e-29, -2.5601705904844596e-28, -6.1193771702238149e-28, -1.3356823805579625e-27, -2.8814553243385351e-27, -6.4780975800711911e-27, -1.5939103631613091e-26, -4.5706206418052813e-26, -1.7046179756558756e-25, -1.0863942205102404e-24]],
        [[5.1771731421876415e-4, 4.6942224031794287e-3, 1.3238104357586944e-2, 2.6559029638527460e-2, 4.5350391088756397e-2, 7.0714985699561307e-2, 1.0440685663721905e-1, 1.4932712475270695e-1, 2.1066889266356097e-1, 2.9914069960116385e-1, 4.4420783901623068e-1], [-9.7741783800541790e-6, -8.8993923357029846e-5, -2.5310463304451255e-4, -5.1446862144495704e-4, -8.9455208192024161e-4, -1.4287226613850099e-3, -2.1758075586714244e-3, -3.2385028596985880e-3, -4.8126786913939122e-3, -7.3331576481799383e-3, -1.2105175083651808e-2], [9.2265180612396811e-8, 8.4358150448013366e-7, 2.4196045573504842e-6, 4.9828244113919616e-6, 8.8226739401398010e-6, 1.4432926931693694e-5, 2.2671588269443569e-5, 3.5117199201566397e-5, 5.4972226544112101e-5, 8.9882789544780989e-5, 1.6493997959422592e-4], [-8.7095438843331306e-10, -7.9963859087998267e-9, -2.3130695568585749e-8, -4.8260550944835483e-8, -8.7015140903737890e-8, -1.4580113093024855e-7, -2.3623454777086368e-7, -3.8079870026030239e-7, -6.2791345215317603e-7, -1.1016967374697777e-6, -2.2474021796912801e-6], [8.2215364636625903e-12, 7.5798470287535002e-11, 2.2112252841532595e-10, 4.6742180442364712e-10, 8.5820181023002625e-10, 1.4728800250390096e-9, 2.4615285394768446e-9, 4.1292487275997209e-9, 7.1722636717021317e-9, 1.3503538413734251e-8, 3.0622148551895994e-8], [-7.7608727530389103e-14, -7.1850060307948750e-13, -2.1138652068544381e-12, -4.5271580819777429e-12, -8.4641631264692183e-12, -1.4879003710858234e-11, -2.5648758015423736e-11, -4.4776137740821881e-11, -8.1924293865681337e-11, -1.6551337903565209e-10, -4.1724440351976626e-10], [7.3260206477078260e-16, 6.8107326528581355e-15, 2.0207918861816256e-14, 4.3847249112459383e-14, 8.3479266271987551e-14, 1.5030738937568488e-13, 2.6725620978263989e-13, 4.8553687201760516e-13, 9.3577010447356483e-13, 2.0287037219745443e-12, 5.6851952100421148e-12], [-6.9155338886013379e-18, -6.4559555090569384e-17, -1.9318165765166359e-16, -4.2467729640906634e-16, -8.2332863780943541e-16, -1.5184021551039650e-15, -2.7847696026018862e-15, -5.2649930516346467e-15, -1.0688718170096584e-14, -2.4865897944279305e-14, -7.7464057764329392e-14], [6.5280472506980494e-20, 6.1196590213214759e-19, 1.8467588422275437e-18, 4.1131612514439580e-18, 8.1202204562719174e-18, 1.5338867328258900e-17, 2.9016881382799968e-17, 5.7091754359139192e-17, 1.2209056002189511e-16, 3.0478224781272628e-16, 1.0554923838809774e-15], [-6.1622719900473469e-22, -5.8008805012054786e-21, -1.7654461885553720e-20, -3.9837532124005658e-20, -8.0087072263902150e-20, -1.5495292184764548e-19, -3.0235154934298608e-19, -6.1908313649821953e-19, -1.3945643057700640e-18, -3.7357274908658111e-18, -1.4381691384550255e-17], [5.8169915618218955e-24, 5.4987073151832704e-23, 1.6877136905642272e-22, 3.8584165287270992e-22, 7.8987252528846841e-22, 1.5653312039835422e-21, 3.1504577354096525e-21, 6.7131222575138017e-21, 1.5929238036608979e-20, 4.5788952420310602e-20, 1.9595882449074747e-19], [-5.4910528488519811e-26, -5.2122709809078357e-25, -1.6134029470876977e-24, -3.7370215751913379e-24, -7.7902513107492203e-24, -1.5812939811055322e-23, -3.2827289649907692e-23, -7.2794754314308767e-23, -1.8194973663532883e-22, -5.6123689255240754e-22, -2.6700517620926133e-21], [5.1836943713566881e-28, 4.9410584534555653e-27, 1.5424547975979868e-26, 3.6195854299528964e-26, 7.6835756508620497e-26, 1.5974669988997055e-25, 3.4206209045903158e-25, 7.8937174900434993e-25, 2.0783126559005720e-24, 6.8791206559610440e-24, 3.6381018773951645e-23], [-4.9070493920193184e-30, -4.7234807550342950e-29, -1.4848545690550679e-28, -3.5290256067137121e-28, -7.6158885678337111e-28, -1.6198976952675898e-27, -3.5737934630850045e-27, -8.5715935545089669e-27, -2.3753954189185044e-26, -8.4333625850312393e-26, -4.9566260599480268e-25]],
    ],
    [
        [[3.9213672215414164e-3, 3.6079746660369984e-2, 1.0485396966584391e-1, 2.2053972602889645e-1, 4.0281569194796994e-1, 6.8875905893396110e-1, 1.1517545329772976e+0, 1.9511144336944335e+0, 3.4850849305330891e+0, 6.9918459105302715e+0, 18.087505502981568e+0, 97.981010371814331e+0], [-1.9513177863048075e-4, -1.7980538529956597e-3, -5.2407095189821285e-3, -1.1069097915173632e-2, -2.0324105536807602e-2, -3.4961166352867390e-2, -5.8839887633761060e-2, -1.0032067373653166e-1, -1.8027185655102964e-1, -3.6352349576098961e-1, -9.4403895515411019e-1, -5.1254339035883876e+0], [3.6320387290773762e-6, 3.2857788580480236e-5, 9.2284276670329552e-5, 1.8425550863923027e-4, 3.1355380885194368e-4, 4.8996447164074264e-4, 7.3458849348513625e-4, 1.0967691179729755e-3, 1.7066141891786733e-3, 2.9811902788145210e-3, 6.8365937390338571e-3, 3.4223702701489610e-2], [-5.9873589633338870e-8, -5.1567697890780020e-7, -1.3073128947510620e-6, -2.2128788779297553e-6, -2.9458371988148531e-6, -3.2122001328192323e-6, -2.7841770921452189e-6, -1.5785220602292843e-6, 2.8308400472292777e-7, 2.4615817842462620e-6, 4.4577872313201231e-6, 5.6782222806002946e-6], [9.2058292986873654e-10, 7.2216197112605477e-9, 1.4749901026287479e-8, 1.6018179777221139e-8, 5.4762802812502991e-9, -1.6293371082305103e-8, -4.0863917148338167e-8, -5.4607673287962828e-8, -4.5669373209114456e-8, -1.2202939032939401e-8, 3.3535731094436793e-8, 6.8829342703040435e-8], [-1.3501844269948703e-11, -9.0457909711407466e-11, -1.1462899390780398e-10, 3.2209702731890277e-11, 2.9646441919602931e-10, 4.3517591298939138e-10, 2.0951025792534876e-10, -3.3833597066770114e-10, -8.0260374678984006e-10, -7.0852768211109828e-10, 2.8939480490752609e-12, 7.8862935163502520e-10], [1.9099719568248764e-13, 9.8756832299099018e-13, 8.5793497978581464e-14, -2.8567486852978584e-12, -3.7170961783813793e-12, 1.1103096230133593e-12, 7.6897079552190131e-12, 6.7118626452552385e-12, -3.9093975043762283e-12, -1.2343778545022791e-11, -6.2498426809419206e-12, 8.2598871884018909e-12], [-2.6216635822970719e-15, -8.6412525561601708e-15, 1.6568947781344270e-14, 3.8283660506936387e-14, -1.7972384105548489e-14, -9.2367538211249422e-14, -2.7873030179441488e-14, 1.2698125318702516e-13, 1.0387008310726740e-13, -1.1084141608829664e-13, -1.5277730435170191e-13, 7.3126384481839097e-14], [3.5017113754612831e-17, 4.0905694253642675e-17, -3.4540238469352778e-16, -5.5286237465501522e-17, 9.8402797379653343e-16, 2.0071011208964367e-16, -1.8013613399108022e-15, -4.4275725400397785e-16, 2.3961033898696677e-15, 3.3194853139021623e-16, -2.4809798048612273e-15, 4.0159213895216486e-16], [-4.5564855762408914e-19, 4.8236327129081757e-19, 3.9452777231065993e-18, -7.1631838288141696e-18, -7.0735455382046647e-18, 2.1041246121390275e-17, 3.7543415724123308e-18, -3.4665056437916940e-17, 1.1407010264291178e-17, 3.1128631923520872e-17, -2.9432608261518738e-17, -3.0491090935058159e-18], [5.7720547821536698e-21, -1.8272707470452755e-20, -1.3710534368527999e-20, 1.3404652950965764e-19, -1.5393761059599640e-19, -1.6191752854355920e-19, 4.6961599864028990e-19, -1.8573401338274017e-19, -4.1941280836149552e-19, 5.6278041258337034e-19, -2.0243652808934060e-19, -1.5681934895010440e-19], [-7.1042989721525711e-23, 3.4538253152251156e-22, -5.2952090123639909e-22, -6.5956076956697711e-22, 3.5977816467557231e-21, -4.6424498206798799e-21, -2.5782472682570618e-22, 7.6132229446276522e-21, -9.3386521870887446e-21, 4.2349270069522149e-21, 1.3236973908251164e-21, -3.5928588752249947e-21], [8.4590315730235582e-25, -4.8911772852174416e-24, 1.4418795850366750e-23, -2.0545694527585810e-23, -3.6527153904310857e-24, 6.9600461096953225e-23, -1.3038769874101765e-22, 1.1765109045167493e-22, -3.2957681821264654e-23, -5.0007005301225130e-23, 7.7202663153470182e-23, -6.5742971840411889e-23], [-9.6768334648297110e-27, 5.2807039248786599e-26, -1.9899360052165869e-25, 5.2780998386833178e-25, -9.1069821814409645e-25, 9.0012004418274281e-25, -1.3036670241916428e-25, -1.1116474611970055e-24, 2.0238997353243874e-24, -2.1283322974011658e-24, 1.6251941073852437e-24, -1.0544302527971752e-24]],
        [[3.5580489495382088e-3, 3.2728206477426266e-2, 9.5063864958238607e-2, 1.9979457848017591e-1, 3.6456529783041528e-1, 6.2263168942730080e-1, 1.0398380709368069e+0, 1.7591764710140691e+0, 3.1381952979246262e+0, 6.2887388594592611e+0, 16.254296142092905e+0, 88.004162010377999e+0], [-1.6871802250608321e-4, -1.5581092851565688e-3, -4.5613471631593470e-3, -9.6968885456234062e-3, -1.7955167169650384e-2, -3.1199401392137707e-2, -5.3107553352905487e-2, -9.1637594714377938e-2, -1.6661902459761469e-1, -3.3956032344296406e-1, -8.8912316620732203e-1, -4.8513517334750582e+0], [2.9937640647541569e-6, 2.7307191582662181e-5, 7.7937600164781107e-5, 1.5924888008544488e-4, 2.7890913017988794e-4, 4.5014345978372977e-4, 6.9742518931516200e-4, 1.0723927664987661e-3, 1.7050837907660453e-3, 3.0090352106080341e-3, 6.8932777356684844e-3, 3.4299006332127194e-2], [-4.7078357242316039e-8, -4.1339598222303430e-7, -1.0894063407812729e-6, -1.9548014868266208e-6, -2.8157399514507710e-6, -3.4026759077810730e-6, -3.3948304325832522e-6, -2.4964613924573267e-6, -5.7999213319190220e-7, 2.1358552790079734e-6, 4.9850432677235012e-6, 6.9171638500706472e-6], [6.9103487085428451e-10, 5.6306958837814808e-9, 1.2509575163304566e-8, 1.6061666601648972e-8, 1.0489964808546842e-8, -7.5263383704665368e-9, -3.4924067614874074e-8, -5.9488849102823460e-8, -6.2378224183774913e-8, -2.9576198590909465e-8, 3.1696439379691358e-8, 8.6757042219045236e-8], [-9.6858713912056730e-12, -6.9500148714343135e-11, -1.0812523126807899e-10, -2.3891820773700561e-11, 2.0450337188757122e-10, 4.3216011774051012e-10, 3.7843611935134556e-10, -1.3737303323577779e-10, -8.5262110968657446e-10, -1.0396219772162778e-9, -2.0843737056919589e-10, 1.0127357450236889e-9], [1.3109781709670293e-13, 7.6569729535299782e-13, 4.1537077639692342e-13, -1.8413617482684832e-12, -3.8244814929856420e-12, -1.2831017905603773e-12, 6.1477539563482563e-12, 9.8753895210344716e-12, 1.0635322298752874e-13, -1.5097355870361553e-11, -1.1808477858801982e-11, 1.0460103088591777e-11], [-1.7244753770203707e-15, -7.1695273802096867e-15, 7.6478981207474348e-15, 3.3352914223202530e-14, 8.5542078793679416e-15, -7.5410540611843646e-14, -7.9859696936422802e-14, 9.2155609004778826e-14, 1.8306429724882067e-13, -7.7640348301424645e-14, -2.5049154261472373e-13, 8.2636422950940722e-14], [2.2113186754148626e-17, 4.8215068251342154e-17, -2.1725879124110372e-16, -2.2562584136188798e-16, 6.5515210245012728e-16, 8.0223399099881605e-16, -1.3472728062005663e-15, -1.7306459925122141e-15, 2.4048033917099248e-15, 1.8929201646543284e-15, -3.6597954383165999e-15, 1.3067609172916069e-16], [-2.7692615801784150e-19, -4.6673558002883901e-21, 3.1004351710041650e-18, -2.5841337212919230e-18, -1.0258277797443928e-17, 1.1575745310392370e-17, 2.0525069610707402e-17, -3.4029603357204727e-17, -1.3592819288499757e-17, 5.6195872551853591e-17, -3.4919911238815642e-17, -1.3647701132170507e-17], [3.3859748619136227e-21, -7.3630404209382937e-21, -2.5096534414012553e-20, 9.1785755819619893e-20, -1.2871271402775314e-20, -2.8273010717760745e-19, 3.2786147516270387e-19, 2.4200777206289752e-19, -8.1758833034071242e-19, 6.4868117188799762e-19, -2.6197366641446438e-20, -4.0868171104686414e-19], [-4.0397131346671811e-23, 1.6825394586322542e-22, -5.4617573971965218e-23, -1.0994367828669524e-21, 2.5876150708434295e-21, -7.6736018300018508e-22, -5.8169089376505834e-21, 1.0890409700162920e-20, -7.4737576719889626e-21, -1.5907585528083657e-21, 7.6676333859267062e-21, -8.5312583409216582e-21], [4.6876358663601791e-25, -2.6592886952503772e-24, 6.0569728632889113e-24, -1.9670979185383635e-25, -3.2225015084543815e-23, 8.0190058665769788e-23, -8.4778648882829514e-23, 6.8545431309868082e-25, 1.2769071673625441e-22, -2.0799352931970690e-22, 2.0087326898607141e-22, -1.5161448608245159e-22], [-5.2726952258404317e-27, 3.3276315306310696e-26, -1.2058730647155443e-25, 2.5247172092515643e-25, -2.0145388864342048e-25, -4.3150556282291308e-25, 1.7424677472772098e-24, -3.1731956959174807e-24, 3.9420912077938389e-24, -3.8552669226769137e-24, 3.2062733098398880e-24, -2.4129659337793904e-24]],
        [[3.2428976660215676e-3, 2.9815751733632142e-2, 8.6525569894432111e-2, 1.8160356097173277e-1, 3.3078143733318517e-1, 5.6370371171950101e-1, 9.3906706627179493e-1, 1.5843740537280403e+0, 2.8185630546135502e+0, 5.6337648539799515e+0, 14.531391269236871e+0, 78.576131176627264e+0], [-1.4685339756102190e-4, -1.3580626897820336e-3, -3.9868957846385249e-3, -8.5124096049137696e-3, -1.5855917369105057e-2, -2.7762986645999483e-2, -4.7699979836512812e-2, -8.3194584988394518e-2, -1.5302444659339707e-1, -3.1539527664190358e-1, -8.3372947053758143e-1, -4.5766024291452211e+0], [2.4892825734073391e-6, 2.2844171825484256e-5, 6.5996202821752792e-5, 1.3731046602928766e-4, 2.4624642058290288e-4, 4.0886679952541103e-4, 6.5360798195589718e-4, 1.0366774438684584e-3, 1.6915784161103457e-3, 3.0310745697199162e-3, 6.9559465441251935e-3, 3.4391055718224687e-2], [-3.7415675019797355e-8, -3.3349153918011811e-7, -9.0595160526300923e-7, -1.7037366773798826e-6, -2.6200474058804672e-6, -3.4562864256719147e-6, -3.8858874503931877e-6, -3.4566340818863302e-6, -1.7124333105717306e-6, 1.4760192891640899e-6, 5.4408004978152999e-6, 8.4817423363911897e-6], [5.2524711652599085e-10, 4.4090937987481450e-9, 1.0460457110432255e-8, 1.5213051286259673e-8, 1.3692356418058844e-8, 6.5422860285345022e-10, -2.6083000344671238e-8, -5.9694036053171957e-8, -7.8947775683739625e-8, -5.4124154067809457e-8, 2.4052255495395177e-8, 1.0970963982974858e-7], [-7.0473426478752523e-12, -5.3359896190648655e-11, -9.6276074693192009e-11, -5.7756733183676486e-11, 1.1761927269602179e-10, 3.7923518775624666e-10, 4.9503734221875997e-10, 1.2330027777158133e-10, -7.8055456393850087e-10, -1.4191596079729978e-9, -5.9038877307865324e-10, 1.2914289625953423e-9], [9.1388506150070533e-14, 5.8619418593894926e-13, 5.4757257436978920e-13, -1.0180356861607080e-12, -3.3465298956563877e-12, -2.9881769630625255e-12, 3.4340407477633716e-12, 1.1514893701425251e-11, 6.1878770195298832e-12, -1.6085208624415970e-11, -2.0647489019554560e-11, 1.2731139379346710e-11], [-1.1533401237889477e-15, -5.6737115225438407e-15, 2.2873146952829398e-15, 2.5259858098455981e-14, 2.3705508024647187e-14, -4.5256637768662749e-14, -1.0917685898525005e-13, 1.9955132835772808e-14, 2.4537195168975410e-13, 1.9966793932977594e-14, -3.8706510928866091e-13, 7.4918635422985239e-14], [1.4207169226264979e-17, 4.4229125993112128e-17, -1.2365954264693980e-16, -2.6396570468739041e-16, 2.9973711696980701e-16, 1.0167755082620141e-15, -4.4229369297562380e-16, -2.6703864328099583e-15, 1.2694470206930725e-15, 4.3339607955071792e-15, -4.8238598607885816e-15, -7.6869118913560549e-16], [-1.7128264540816848e-19, -1.8316523586888940e-19, 2.1145367800658505e-18, 1.5465925406404972e-19, -8.9678005888744095e-18, 6.1127360096221937e-19, 2.7680943392114150e-17, -1.5367677016305429e-17, -5.0326269934184259e-17, 7.7064259832457404e-17, -2.5725371875002352e-17, -4.0179883407414854e-17], [2.0198041647017718e-21, -2.2344751432498366e-21, -2.2977047116283094e-20, 4.6731944151909364e-20, 6.5755008784523953e-20, -2.4362817780081607e-19, 1.8384672517651218e-20, 6.6126039675596578e-19, -9.3833857240618476e-19, 2.8562668456160229e-19, 5.8971689173768329e-19, -9.9954102473562707e-19], [-2.3330440238109680e-23, 7.5298822356852473e-23, 1.1572748356178555e-22, -8.9103416763673778e-22, 1.0064866035744765e-21, 2.2129159335573374e-21, -7.3921864621270020e-21, 6.8150130658031362e-21, 3.5659478744495662e-21, -1.6546162621237582e-20, 2.1970070607885675e-20, -1.9859504446174718e-20], [2.6274405985261673e-25, -1.3419161002990377e-24, 1.6030208050612915e-24, 7.1301889369886047e-24, -3.0041124440532084e-23, 3.9360034104160673e-23, 2.1305840219690287e-23, -1.6622028901727399e-22, 3.2224594734375748e-22, -4.0939746097972155e-22, 4.0577459338127806e-22, -3.4650674331221404e-22], [-2.8944997028784397e-27, 1.8428593693669936e-26, -5.5553585271530462e-26, 4.9955631072855857e-26, 2.1727291637581743e-25, -9.6877348181997715e-25, 1.9939588577499690e-24, -2.6686267376083178e-24, 2.7324699268343445e-24, -3.0996012843476021e-24, 4.3787964909263088e-24, -5.5186437009854949e-24]],
        [[2.9677775783559945e-3, 2.7270503100811298e-2, 7.9047236695904799e-2, 1.6561534178444179e-1, 3.0094274181082650e-1, 5.1131782245539101e-1, 8.4874380995516676e-1, 1.4261356750877966e+0, 2.5259658164415987e+0, 5.0272670876447204e+0, 12.919790555292238e+0, 69.698399498485226e+0], [-1.2860221087184381e-4, -1.1901940331130989e-3, -3.4997082170024669e-3, -7.4916625775629056e-3, -1.4007832342561721e-2, -2.4657226797760005e-2, -4.2663956840824614e-2, -7.5083035459985779e-2, -1.3959661202703396e-1, -2.9109284412022475e-1, -7.7781528946451985e-1, -4.3010349446459926e+0], [2.0864250506361804e-6, 1.9232664074476786e-5, 5.6067800154182559e-5, 1.1828427529009167e-4, 2.1618446652415541e-4, 3.6769082286014825e-4, 6.0481171098207857e-4, 9.8959731490140406e-4, 1.6629677311754692e-3, 3.0425875638466816e-3, 7.0230574513407784e-3, 3.4504276656006016e-2], [-3.0030248764998698e-8, -2.7077044387592319e-7, -7.5325985775114551e-7, -1.4706729731135804e-6, -2.3862729464789484e-6, -3.3894027755259792e-6, -4.2205879091055872e-6, -4.3769836031011657e-6, -3.0900228206343069e-6, 3.6249748864184022e-7, 5.7002424302998512e-6, 1.0460969630602291e-5], [4.0386093693250723e-10, 3.4705134157580475e-9, 8.6695059502726287e-9, 1.3866007448388487e-8, 1.5299746128254669e-8, 7.4379874222025364e-9, -1.5610085836325351e-8, -5.4470567960307596e-8, -9.2501556746517471e-8, -8.6230486331030934e-8, 6.3182027537322233e-9, 1.3874241244615107e-7], [-5.1953536338555407e-12, -4.1044238431108638e-11, -8.2748685813963428e-11, -7.4640518020609424e-11, 4.6073001357309314e-11, 2.9594768517339389e-10, 5.4008220110624186e-10, 3.9638952601469686e-10, -5.4693039089465152e-10, -1.7802238005398821e-9, -1.2340648007514347e-9, 1.6177085570762501e-9], [6.4633357767459334e-14, 4.4606314628614530e-13, 5.6645986836051970e-13, -4.2602059448487837e-13, -2.5930233386271067e-12, -3.8087130917834040e-12, 3.2622678518977420e-13, 1.0833161016706089e-11, 1.3306178132207720e-11, -1.3161761487120832e-11, -3.3740391819661882e-11, 1.4200479285603677e-11], [-7.8358250100807466e-16, -4.3756597286928748e-15, -6.1825377502361852e-16, 1.7192392311535101e-14, 2.8702326877317258e-14, -1.4032061495719204e-14, -1.0784828033070572e-13, -6.8815331969783115e-14, 2.5035726926483914e-13, 2.0345921419876683e-13, -5.4942764725388336e-13, 1.7410956932529450e-14], [9.2780764576055715e-18, 3.6674792787919708e-17, -6.2711408166775371e-17, -2.3324257410049564e-16, 3.1382347256402782e-17, 8.9059715652900219e-16, 4.9429641387105487e-16, -2.6996385180892880e-15, -1.1360009046971720e-15, 7.0827131329005327e-15, -5.0344637314332964e-15, -3.1986769810607379e-15], [-1.0778726504992410e-19, -2.2222905321212391e-19, 1.3113394192668589e-18, 1.3453322019409866e-18, -5.8302210079872623e-18, -6.8060987982757278e-18, 2.2542896232790389e-17, 1.4340997866190837e-17, -7.9842921577574236e-17, 6.7760403112585663e-17, 2.3698785383265105e-17, -1.0374640156203995e-16], [1.2246231965787209e-21, -4.9003817677894075e-23, -1.7008424467596901e-20, 1.5437853689712787e-20, 8.2973181120980989e-20, -1.2190274368766998e-19, -2.5273667063015476e-19, 7.4973212238431176e-19, -4.1386648636763885e-19, -9.0699071194797980e-19, 2.0589807537302877e-18, -2.3647868376599314e-18], [-1.3715023989833611e-23, 2.9581996941286461e-23, 1.4112823892759146e-22, -5.3253762242746146e-22, -1.1040316222147144e-22, 2.9586504513910833e-21, -4.3540506762266627e-21, -3.2639800222086260e-21, 2.0280653161458067e-20, -3.7662889787705308e-20, 4.6185587958229143e-20, -4.5676963104482555e-20], [1.4880921387309062e-25, -6.4113979818545666e-25, -2.3542347886080260e-25, 7.0734549622404298e-24, -1.6013710940585273e-23, -5.6033441471567351e-24, 9.3098485818823907e-23, -2.2392735299258693e-22, 3.1954465680611875e-22, -4.0138903883167114e-22, 5.6990647547850827e-22, -7.8864314715517928e-22], [-1.6215273621599605e-27, 9.3284210722572541e-27, -1.9536112144194599e-26, -3.6015275586242747e-26, 2.7682999891494828e-25, -6.6926463343524503e-25, 6.1175396877867251e-25, 7.2359641403260693e-25, -3.5212740340701804e-24, 4.9305267095932047e-24, 3.2551195770911730e-25, -1.2438491893150119e-23]],
        [[2.7261960667960584e-3, 2.5034314542248352e-2, 7.2469323415511902e-2, 1.5152499092898636e-1, 2.7456884519327657e-1, 4.6481780217643567e-1, 7.6809155037578509e-1, 1.2837100515577948e+0, 2.2599406830132116e+0, 4.4694174715797571e+0, 11.420560825118630e+0, 61.372789674444774e+0], [-1.1324979633010948e-4, -1.0484445278187168e-3, -3.0850852062613724e-3, -6.6123254337094130e-3, -1.2388686761056742e-2, -2.1875951281310115e-2, -3.8031478562852874e-2, -6.7390477796128025e-2, -1.2646705888861197e-1, -2.6676100429025542e-1, -7.2135768853693851e-1, -4.0244582878939191e+0], [1.7616577698545130e-6, 1.6291274727110418e-5, 4.7808708253702509e-5, 1.0191668607517456e-4, 1.8903816859187536e-4, 3.2791104138573258e-4, 5.5302121158305999e-4, 9.3214951797803381e-4, 1.6167087977149766e-3, 3.0374353223890205e-3, 7.0910948605105866e-3, 3.4644255074588340e-2], [-2.4322347383868270e-8, -2.2126700575915530e-7, -6.2705833924878738e-7, -1.2611657632717148e-6, -2.1372136050701562e-6, -3.2280887362846636e-6, -4.3844964344588132e-6, -5.1717866107172422e-6, -4.6379305990181120e-6, -1.3167655984703768e-6, 5.5543442755802919e-6, 1.2958105217323246e-5], [3.1384802203073110e-10, 2.7474139427546305e-9, 7.1480774117801380e-9, 1.2305787727470163e-8, 1.5663822931600116e-8, 1.2426605367905453e-8, -4.9626073946057623e-9, -4.4146597117857948e-8, -9.9711634965586231e-8, -1.2439159970235995e-7, -2.7795215646103850e-8, 1.7446703481441869e-7], [-3.8771617435815207e-12, -3.1683680320815733e-11, -6.9548925548768202e-11, -7.9883790351000226e-11, -6.5735894126084480e-12, 2.0279030438351679e-10, 5.1413432698994373e-10, 6.2417519544285310e-10, -1.5029226210880857e-10, -2.0002148473562709e-9, -2.2451827089263739e-9, 1.9485888468181073e-9], [4.6327417255043511e-14, 3.3878193797650496e-13, 5.2728370441027137e-13, -4.1233027078029763e-14, -1.8023980987925212e-12, -3.8447353872515376e-12, -2.3657595266394857e-12, 7.8132546279364984e-12, 1.9363653178853618e-11, -3.9952719915337013e-12, -5.1112872952206015e-11, 1.2536847885318958e-11], [-5.4038130355173772e-16, -3.3283812340121811e-15, -1.9891694608827774e-15, 1.0582559955309119e-14, 2.6967876530793625e-14, 9.8510691262733026e-15, -8.1290456134108708e-14, -1.4161598021324965e-13, 1.6680087844003968e-13, 4.5860604255039723e-13, -6.7653937575825074e-13, -1.6766511512932064e-13], [6.1511555506489409e-18, 2.8881736433855261e-17, -2.6304764514848104e-17, -1.7848913187378026e-16, -1.2163641031693535e-16, 5.8767219779212297e-16, 1.0901242197642080e-15, -1.7051209070137421e-15, -4.0587667209394363e-15, 8.4279772532423780e-15, -2.1383021939857772e-15, -9.2414629296923347e-15], [-6.9038774112387599e-20, -2.0571859683629844e-19, 7.4902224728242013e-19, 1.5863013540625825e-18, -2.7864202423651617e-18, -9.2616981886761290e-18, 9.9687187137341109e-18, 3.8566376620723422e-17, -7.4976310872757774e-17, -5.8975188065249086e-18, 1.5431813109752893e-16, -2.5238707612359982e-16], [7.5226576196964299e-22, 7.1878119917852882e-22, -1.1313519097446371e-20, -1.3210386408514303e-21, 6.5899305312038201e-20, -7.4537933988267944e-21, -3.4228600583846796e-19, 3.9959584222718822e-19, 7.1635948282273860e-19, -2.8326465481209939e-18, 4.6351302734035128e-18, -5.4861994786624750e-18], [-8.2690741963253325e-24, 7.9938564794283860e-24, 1.1345669194410746e-22, -2.4911987764744871e-22, -5.7032848969230840e-22, 2.0772889623733082e-21, 2.1255213470837035e-22, -1.1647499731887803e-20, 2.8138677151377008e-20, -4.4832862786861071e-20, 6.7764482540686918e-20, -1.0367432976093945e-19], [8.3959040179848854e-26, -3.0166384733617338e-25, -7.8441122259069766e-25, 4.6133739728134694e-24, -4.0769699692020373e-24, -2.6566280505454912e-23, 8.4852859958238445e-23, -9.9950492423917184e-23, -4.7594331471369501e-23, 2.3308357587173179e-22, 1.5466368321195451e-22, -1.7270403452588220e-21], [-9.3548954555384994e-28, 4.3104275503398217e-27, -3.8482607108944008e-27, -5.0741561923286048e-26, 1.7230683052848447e-25, -1.4784256344135542e-25, -7.9658024726184450e-25, 3.6181515625632421e-24, -9.7656877989654112e-24, 1.9760004617814956e-23, -2.0076295467708530e-23, -2.3484924672289751e-23]],
        [[2.5129220935413945e-3, 2.3059845010840309e-2, 6.6659099947698297e-2, 1.3907003197705966e-1, 2.5122555490840004e-1, 4.2356908952976354e-1, 6.9628569963256012e-1, 1.1561819508729569e+0, 2.0197448064602315e+0, 3.9601190142836673e+0, 10.034777393245942e+0, 53.601555057774163e+0], [-1.0024416499530658e-4, -9.2803328869902595e-4, -2.7308714106254131e-3, -5.8543020448305382e-3, -1.0974731128434954e-2, -1.9403954897048212e-2, -3.3818356628922277e-2, -6.0192527427856808e-2, -1.1378318842823448e-1, -2.4256161128136588e-1, -6.6437375940299752e-1, -3.7466317459370849e+0], [1.4975426182234095e-6, 1.3880259940535663e-5, 4.0926493345913571e-5, 8.7911403848936776e-5, 1.6488406062409021e-4, 2.9048487179442539e-4, 5.0025824335973817e-4, 8.6629105104569880e-4, 1.5514675510294041e-3, 3.0083687506155187e-3, 7.1533631677227155e-3, 3.4817834119921693e-2], [-1.9865485722200893e-8, -1.8196589272051588e-7, -5.2314970871458974e-7, -1.0770185313490983e-6, -1.8897467369795245e-6, -3.0017020562810277e-6, -4.3854212459178507e-6, -5.7695174543864521e-6, -6.2308189541491516e-6, -3.6273720918373640e-6, 4.6772400864288928e-6, 1.6075378326708749e-5], [2.4630369302878145e-10, 2.1880107011499474e-9, 5.8787390691815443e-9, 1.0719102707970207e-8, 1.5158334470315259e-8, 1.5591697793146752e-8, 4.5893704819699664e-9, -3.0135200305529435e-8, -9.7777424462633435e-8, -1.6416111219113320e-7, -8.6513403877644685e-8, 2.1585274827870471e-7], [-2.9267345497706020e-12, -2.4573445415928756e-11, -5.7635573515063565e-11, -7.7911121732536302e-11, -4.1285534899092518e-11, 1.1564550010429800e-10, 4.3422319990523363e-10, 7.5931181249796308e-10, 3.5356584491013947e-10, -1.9126017469869702e-9, -3.7003842771366574e-9, 2.1495604264750971e-9], [3.3616424145222278e-14, 2.5745535395802247e-13, 4.6328665054518608e-13, 1.8352126115047320e-13, -1.1135397995811759e-12, -3.3552407331323263e-12, -4.1179759927235411e-12, 3.3087284032945152e-12, 2.1862911378482656e-11, 1.2412923091793854e-11, -6.9890033834881673e-11, 1.9745346534650033e-12], [-3.7815032671401601e-16, -2.5166479656736596e-15, -2.4777422108961106e-15, 5.7565081469565220e-15, 2.1927920829049712e-14, 2.3419980453072140e-14, -4.3223772722305419e-14, -1.7193929309645527e-13, 1.5703302153195624e-15, 6.9953852637553650e-13, -6.1452426036783968e-13, -6.6168431095364079e-13], [4.1293556259635526e-18, 2.2044637990811349e-17, -6.3864440395217262e-18, -1.2444801016747011e-16, -1.8086372958618037e-16, 2.6739278504271983e-16, 1.2144683704815775e-15, -1.6027097820976381e-16, -5.9634363060069540e-15, 5.7604710370628317e-15, 7.4571322025475738e-15, -2.3631427809293850e-14], [-4.5191948584119887e-20, -1.7348690993422188e-19, 3.8490072378349595e-19, 1.3704917169731712e-18, -6.8221343989605561e-19, -8.1186375807458997e-18, -2.5102627789975734e-18, 4.3585547399504865e-17, -2.4071229246657406e-17, -1.5126706535513615e-16, 3.9644956362074690e-16, -5.9184253439431484e-16], [4.6240152435678081e-22, 8.2062358912947948e-22, -7.1745233249984476e-21, -8.2774360353572777e-21, 3.9154938946498557e-20, 5.5102547863399296e-20, -2.6091464861545121e-19, -1.4929421299995967e-19, 1.7231957612113320e-18, -4.1459212799778078e-18, 7.2404431703671372e-18, -1.2296893730354226e-17], [-5.1803959308490807e-24, -1.9446125653791888e-24, 7.5177398350696517e-23, -8.4452220944915020e-23, -5.9534301791370999e-22, 7.8674218440487985e-22, 3.0515307711902922e-21, -1.1757013434505976e-20, 1.3763195473805957e-20, -4.8406939019166051e-21, 3.4343783695729516e-20, -2.1403859131643673e-19], [4.9720064528435172e-26, -1.1817488530257731e-25, -7.1717990395035049e-25, 2.4615213367454790e-24, 2.2819293757572784e-24, -2.4151029128938681e-23, 3.1356019660070983e-23, 9.1407209058797129e-23, -5.2230869916426009e-22, 1.4711907900049359e-21, -1.9056811734981540e-21, -2.6717895703766066e-21], [-3.4628440506361859e-28, 3.7095127557877159e-27, 7.3179667948958686e-27, -2.5791074782503276e-26, 8.6786588835097130e-26, 2.0800504037803589e-25, -1.0407541093666037e-24, 3.1875042804052095e-24, -6.3813153910532460e-24, 2.3660827130824233e-23, -6.0872820487505359e-23, 2.5381162371155732e-24]],
        [[2.3237037428534793e-3, 2.1308302589091554e-2, 6.1505962751340517e-2, 1.2802577354149385e-1, 2.3052621845376603e-1, 3.8697408632120508e-1, 6.3248569953362126e-1, 1.0425029703468979e+0, 1.8043350956553254e+0, 3.4988915533727669e+0, 8.7634138074562183e+0, 46.387488688002571e+0], [-8.9154553442969503e-5, -8.2516571696217094e-4, -2.4270554322387208e-3, -5.1999087365697021e-3, -9.7423146198624518e-3, -1.7219768157991822e-2, -3.0024919189079670e-2, -5.3546158552399281e-2, -1.0169640166885683e-1, -2.1871619462494395e-1, -6.0695212130170379e-1, -3.4672554973174843e+0], [1.2810030656615021e-6, 1.1891525105077530e-5, 3.5176908105959317e-5, 7.5965700661526525e-5, 1.4363088947006791e-4, 2.5602404745114724e-4, 4.4834202315667229e-4, 7.9467452599350277e-4, 1.4676358875340102e-3, 2.9478898691459472e-3, 7.1984328845523463e-3, 3.5032866036579419e-2], [-1.6352417777614065e-8, -1.5057634706398656e-7, -4.3773130743299523e-7, -9.1769208969100686e-7, -1.6550743336861475e-6, -2.7378697900635534e-6, -4.2482196510146287e-6, -6.1275055004115852e-6, -7.7105563915465725e-6, -6.5368209444805216e-6, 2.6046512453665329e-6, 1.9867400830434934e-5], [1.9505052059706427e-10, 1.7530116090472134e-9, 4.8315251312726005e-9, 9.2158401109103321e-9, 1.4111665864905086e-8, 1.7156377338825123e-8, 1.2209590186922318e-8, -1.4541896100698311e-8, -8.5568488445195258e-8, -1.9776532014989751e-7, -1.7848571038780554e-7, 2.5727803159637761e-7], [-2.2334530589021938e-12, -1.9165947129539822e-11, -4.7361335509086048e-11, -7.1979269040249039e-11, -6.1309821762793496e-11, 4.3702204432137390e-11, 3.2511147502714995e-10, 7.8175547017565675e-10, 8.5693509206110969e-10, -1.3649777980873830e-9, -5.5420380863547066e-9, 1.8655949916563411e-9], [2.4656654705278501e-14, 1.9597014092469122e-13, 3.9277174718897274e-13, 2.9587980264934769e-13, -5.8240654470140808e-13, -2.6202948507928164e-12, -4.8104862813672146e-12, -1.3550913977146808e-12, 1.9204361670048900e-11, 3.3538245638709960e-11, -8.1204762010049576e-11, -3.1136580893426884e-11], [-2.6887725503073647e-16, -1.9050477449495783e-15, -2.5098537099521475e-15, 2.4943483934561780e-15, 1.6000935303843052e-14, 2.7774756752572215e-14, -7.5390982538509997e-15, -1.5402804109932833e-13, -1.8911470417583442e-13, 7.6572518408079718e-13, -9.0802861259509298e-14, -1.8742476681677579e-12], [2.7865618024293873e-18, 1.6360094207080830e-17, 3.0234428539384737e-18, -8.1672098874050961e-17, -1.8313606740190540e-16, 2.0373847801122421e-17, 9.7134183201316048e-16, 1.1922501116745277e-15, -5.5166535295477398e-15, -2.5040728210275976e-15, 2.6970229056606562e-14, -5.6372193592234745e-14], [-3.0584250587476794e-20, -1.4320396388165596e-19, 1.5599228262929704e-19, 9.9704259200593140e-19, 4.0801506092566074e-19, -5.5154853058352231e-18, -9.9899188445766238e-18, 2.9068140559947509e-17, 4.8830489066972975e-17, -2.9688159653979149e-16, 6.7680580580213452e-16, -1.3044093044808300e-15], [2.8463873468412573e-22, 6.9805309499149578e-22, -4.4023644176272408e-21, -9.6197110400961425e-21, 1.6933500139430820e-20, 6.9170290919673781e-20, -1.0987936874363782e-19, -5.2173063978157479e-19, 1.7131846510295735e-18, -2.4615444773120811e-18, 5.4736614683040136e-18, -2.3840971314878938e-17], [-2.8515372427312573e-24, -1.0616532745474070e-24, 5.8082901821595502e-23, 2.4628719455013079e-23, -3.7759028387934561e-22, -1.2384220967536875e-23, 3.5228425766951292e-21, -4.3252444114321141e-21, -1.4355148586692143e-20, 8.6306353915110641e-20, -1.4509788326037280e-19, -2.7459091335930669e-19], [5.6198993229817220e-26, 2.0988152916952849e-25, 2.0644937849933629e-25, 2.6380376417586378e-24, 7.0451819620084787e-24, -7.2724449001936000e-24, -4.6947442990205265e-24, 1.9753992911706214e-22, -5.3661624686337057e-22, 2.0536503721044580e-21, -5.6560378973020620e-21, 2.1571260846700821e-21], [6.7280678794130992e-28, 9.9614326448905397e-27, 3.0401149739011111e-26, 3.7630721852116589e-26, 1.1447278924797885e-25, 4.2444435616586477e-25, -2.4692112655439884e-25, 8.3136788623794081e-25, 6.3807803179706761e-24, -7.7749833305327240e-24, -6.8318333130917737e-23, 2.3938381033583578e-22]],
        [[2.1550566046306204e-3, 1.9747699822025085e-2, 5.6917515582897033e-2, 1.1820050833097804e-1, 2.1213038883749446e-1, 3.5448202796404046e-1, 5.7586380925461844e-1, 9.4153318405697254e-1, 1.6123749039823099e+0, 3.0847547455952898e+0, 7.6071557512185588e+0, 39.734046619341969e+0], [-7.9641589201843150e-5, -7.3681191952721322e-4, -2.1654058746095397e-3, -4.6338324471564440e-3, -8.6689701154723556e-3, -1.5298281454920295e-2, -2.6638323238759484e-2, -4.7485668142640016e-2, -9.0347240973750106e-2, -1.9550239080030207e-1, -5.4929729106966598e-1, -3.1859664878658907e+0], [1.1021223884033653e-6, 1.0241029186265287e-5, 3.0358294725851898e-5, 6.5791912682757081e-5, 1.2508218081832056e-4, 2.2483511844132316e-4, 3.9872970831784470e-4, 7.2025487687618306e-4, 1.3675356033415677e-3, 2.8497225668211920e-3, 7.2085558324403079e-3, 3.5297014376930049e-2], [-1.3559200388056732e-8, -1.2535629863107380e-7, -3.6751618622360786e-7, -7.8135067137312736e-7, -1.4397160805284700e-6, -2.4595286861394310e-6, -4.0071343212752859e-6, -6.2382398688551952e-6, -8.9196342167762601e-6, -9.8687333233087960e-6, -1.2425470155349237e-6, 2.4219607732144279e-5], [1.5573727038393089e-10, 1.4126910824828968e-9, 3.9729458062713628e-9, 7.8515281479700201e-9, 1.2778631912697461e-8, 1.7464215257745716e-8, 1.7556860084818506e-8, 4.4449469597292824e-10, -6.4344253048409292e-8, -2.1536952760454179e-7, -3.0841777005223382e-7, 2.8160308363550853e-7], [-1.7229037981934813e-12, -1.5048170336886388e-11, -3.8763087122938451e-11, -6.4304769786029364e-11, -7.0555919768143105e-11, -9.9433489691685814e-12, 2.1028382646284732e-10, 7.0260787978683387e-10, 1.2364080527502388e-9, -3.2217140934432779e-10, -7.4003178044462154e-9, 2.3423897681530694e-10], [1.8225454773726186e-14, 1.4922223066576599e-13, 3.2448318418189806e-13, 3.3402374781985874e-13, -2.1344003698870671e-13, -1.8595388708286298e-12, -4.6448005229314715e-12, -5.0064656285183162e-12, 1.1787126141982019e-11, 5.2165597728350115e-11, -6.7798177710632798e-11, -1.1735997415970595e-10], [-1.9531791973908119e-16, -1.4584503922347524e-15, -2.3518052764004586e-15, 3.8558616303933359e-16, 1.0480727477225270e-14, 2.5779935561581411e-14, 1.7239779170888841e-14, -1.0336201371291979e-13, -3.2592331203550328e-13, 5.0463474877344484e-13, 1.1866382770447104e-12, -4.6330004943794613e-12], [1.8686357688938780e-18, 1.1738552494372004e-17, 6.1592943191083315e-18, -5.2037282824802370e-17, -1.5918187658775219e-16, -1.2884171963820244e-16, 5.6922222390114474e-16, 1.8432105462843860e-15, -2.7351711864251268e-15, -1.3807508730529348e-14, 5.2935269454298217e-14, -1.2269077451833788e-13], [-2.0748702259628589e-20, -1.1110919212889817e-19, 4.0489514877512521e-20, 6.8063441449251693e-19, 8.7617884235205456e-19, -2.7795433722446171e-18, -1.1362979838611054e-17, 7.2531429715570269e-18, 9.8741955168006218e-17, -2.9378655081050667e-16, 6.7862069481934799e-16, -2.4062642866190661e-15], [2.3569270776053083e-22, 1.0907295630208067e-21, -9.6138060648393772e-22, -4.7683106277056514e-21, 1.0133327896031890e-20, 6.9186801919964242e-20, 3.9715958075125022e-20, -4.9848247317130508e-19, 6.8109455058626671e-19, 3.1196267881287147e-18, -7.7244790212295460e-18, -2.6918463669596891e-17], [1.0940125918769053e-24, 2.4366248358642171e-23, 1.1504649020075868e-22, 2.2272006561296274e-22, 1.2536211587006712e-22, 2.0058427294888731e-22, 3.3407882454431548e-21, 5.2728728418175468e-21, -2.8004690459123983e-20, 1.5327526632373830e-19, -4.6049287673797202e-19, 3.4457451477486955e-19], [1.1325066938161826e-25, 8.8073801347750012e-25, 2.2612992262319573e-24, 5.9016632806019789e-24, 1.4010922475417581e-23, 1.5838680060656646e-23, 2.3502005539387257e-24, 1.8391351367484505e-22, 2.1655157745630673e-23, 2.8822881000034056e-22, -6.1915667665734568e-21, 2.8724691319078128e-20], [1.1871898802515162e-27, 1.2887578348190033e-26, 3.9338746579938869e-26, 6.6408114112145279e-26, 1.1732852207208643e-25, 3.7547220925298945e-25, 3.2688615340601230e-25, -1.3426597425702273e-24, 1.2362159007294974e-23, -5.8508954158022245e-23, 8.1887368183222036e-23, 8.1607447517435964e-22]],
        [[2.0041034228258220e-3, 1.8351497591515092e-2, 5.2816330206069090e-2, 1.0943093225849390e-1, 1.9574077878119774e-1, 3.2559401787575950e-1, 5.2562828675298813e-1, 8.5208759362876329e-1, 1.4422706987084659e+0, 2.7161313493888745e+0, 6.5661154488996051e+0, 33.645463625011942e+0], [-7.1435564349864619e-5, -6.6053821138976116e-4, -1.9391559328233446e-3, -4.1429612702099188e-3, -7.7340518514802536e-3, -1.3612937304784227e-2, -2.3635771324141974e-2, -4.2021922580972972e-2, -7.9850637002041833e-2, -1.7323691792945672e-1, -4.9178412818002450e-1, -2.9023521290245768e+0], [9.5329782360735108e-7, 8.8630342736524101e-6, 2.6305230093997605e-5, 5.7128423592138794e-5, 1.0898511661008216e-4, 1.9698356978386162e-4, 3.5244925006522161e-4, 6.4587884805762446e-4, 1.2551799509629399e-3, 2.7106407196532458e-3, 7.1589063029098909e-3, 3.5614200339961523e-2], [-1.1321048706625825e-8, -1.0497952742785774e-7, -3.0974999283553341e-7, -6.6557885032372443e-7, -1.2467354177663644e-6, -2.1838809648496867e-6, -3.6984394897165514e-6, -6.1261013724494960e-6, -9.7391838474211393e-6, -1.3294377509829332e-5, -7.4346906437828866e-6, 2.8556521299022118e-5], [1.2524256466611710e-10, 1.1444382389957796e-9, 3.2703468902558808e-9, 6.6455935848200005e-9, 1.1337218796585386e-8, 1.6874799437491251e-8, 2.0695981027205812e-8, 1.3095688247977517e-8, -3.7563055847338427e-8, -2.0844402224643451e-7, -4.6893052220321154e-7, 2.4495819177270527e-7], [-1.3449836391924604e-12, -1.1917757522668185e-11, -3.1742059594775700e-11, -5.6324912390265954e-11, -7.2700119933675547e-11, -4.6448768677173498e-11, 1.0629965697915269e-10, 5.5450572733193481e-10, 1.4033129486730975e-9, 1.0408450472114325e-9, -8.4179734550359680e-9, -4.6689306012281706e-9], [1.3495430486286266e-14, 1.1311936090059450e-13, 2.6162603706137710e-13, 3.2506588783483246e-13, 1.4130039242288405e-14, -1.2064808444928388e-12, -3.9647019299305871e-12, -7.0596881579060671e-12, 1.9943024168080406e-12, 5.8766894486172216e-11, -7.8612110765400433e-12, -3.1623377171859524e-10], [-1.4545614956268379e-16, -1.1354738606327366e-15, -2.1267515589821596e-15, -8.9982630779135425e-16, 5.9930808244768473e-15, 2.0623000491237263e-14, 2.9507849134478817e-14, -4.3453489544673363e-14, -3.5362067636892783e-13, -6.9386775337372623e-14, 3.1678764749980003e-12, -1.0092219083754525e-11], [1.3187784705765982e-18, 8.9092439368162974e-18, 8.4771546169360016e-18, -2.7781319614367420e-17, -1.1710807627204299e-16, -1.7454420913762866e-16, 2.2479948976167893e-16, 1.8225548909827762e-15, 1.0310576743346327e-15, -2.0562126099530862e-14, 6.6299133930040711e-14, -2.2012103860989253e-13], [-8.6061327521566322e-21, -3.1888177987863675e-20, 1.4043692152882068e-19, 7.7723369196226772e-19, 1.6019047226700647e-18, 4.3586876851258242e-19, -6.7628704680687699e-18, -5.7952310379087452e-18, 1.0367120481094151e-16, -4.1970232568658465e-17, -9.7676619903821545e-17, -2.6051000463240289e-15], [4.1599844917987017e-22, 3.2376604430192690e-21, 6.9316755006044720e-21, 1.1895799498694131e-20, 3.1320565116958668e-20, 9.8759888710458390e-20, 1.9209071829111212e-19, -1.0932087864514856e-19, -3.3717561351158776e-19, 8.9718010354068270e-18, -3.1758983925489255e-17, 3.5553161159404657e-17], [7.0555200968658151e-24, 7.3297184276273423e-23, 2.4410206037959639e-22, 5.2847411876468920e-22, 8.1530184451879147e-22, 1.1455238995632555e-21, 3.5294068095466639e-21, 1.1263737236428329e-20, -1.5176932168144445e-20, 8.4518223725164511e-20, -5.4094707023255460e-19, 2.8964867675877334e-18], [1.0170179239171387e-25, 8.3748667176248570e-25, 2.1520326090487958e-24, 4.7743683689194620e-24, 1.0573912083965978e-23, 1.4969984177938967e-23, -6.9359071463066236e-24, 3.7091186746877920e-23, 3.9656719822215567e-22, -3.1914060477481944e-21, 5.2097326439587083e-21, 7.7706859278985986e-20], [-2.7394255846066143e-27, -2.4724006583574007e-26, -7.3652167457582315e-26, -1.7521902325452287e-25, -3.6926223985988213e-25, -6.2142134647774098e-25, -1.1175588467374867e-24, -4.6712328632124894e-24, -8.6474661963731238e-25, -6.2351203523430032e-23, 3.4754037648688363e-22, 7.7703935123973181e-22]],
        [[1.8684512437853948e-3, 1.7097544583709101e-2, 4.9137287118755851e-2, 1.0157796633190522e-1, 1.8109928419696338e-1, 2.9986421189751795e-1, 4.8103985727032047e-1, 7.7298101874468933e-1, 1.2922349700408014e+0, 2.3907987829734220e+0, 5.6394375147521242e+0, 28.126798456383854e+0], [-6.4320462698496635e-5, -5.9437887528996638e-4, -1.7427386868096071e-3, -3.7161569733364175e-3, -6.9190406246255797e-3, -1.2137384980683453e-2, -2.0987943679961345e-2, -3.7144601177341788e-2, -7.0284761729808207e-2, -1.5224454780615798e-1, -4.3500998711732465e-1, -2.6160114991257306e+0], [8.2863425827272170e-7, 7.7057299615137827e-6, 2.2882285013584677e-5, 4.9743626056662005e-5, 9.5064881447553489e-5, 1.7236173668358945e-4, 3.1010899887654199e-4, 5.7395812080759185e-4, 1.1356293591274152e-3, 2.5320277395020736e-3, 7.0191761221671062e-3, 3.5975678204996055e-2], [-9.5160683724981614e-9, -8.8438082779370259e-8, -2.6218162406609827e-7, -5.6784745410610324e-7, -1.0769032932394282e-6, -1.9227037783555626e-6, -3.3551725826747791e-6, -5.8373529607507760e-6, -1.0116318458068411e-5, -1.6388305386848452e-5, -1.6260370468121853e-5, 3.1205100434014884e-5], [1.0127580132365125e-10, 9.3082226115508730e-10, 2.6936594314980774e-9, 5.5946766131113292e-9, 9.8982749394079100e-9, 1.5699948847114553e-8, 2.1940832517341020e-8, 2.2426134598139675e-8, -9.7866998105981229e-9, -1.7406118841622214e-7, -6.3080202175451201e-7, 4.8372306735207159e-8], [-1.0653531142877068e-12, -9.5521978365155953e-12, -2.6139842518914687e-11, -4.8895817824275133e-11, -7.0707006742052703e-11, -6.9061792397369994e-11, 2.1709632170143572e-11, 3.7686425922227333e-10, 1.3394168947346613e-9, 2.3547881592319599e-9, -7.3155446371083986e-9, -1.6514878341743915e-8], [9.9936057429042694e-15, 8.5361931818988155e-14, 2.0714354827152648e-13, 2.9256128274521105e-13, 1.4029952634272788e-13, -6.9883265123760195e-13, -3.0621186658558703e-12, -7.4916652131357169e-12, -6.9086881682762542e-12, 4.7905939559136081e-11, 1.0802858664979580e-10, -7.0778724851131961e-10], [-1.0433782257107984e-16, -8.3701008582365517e-16, -1.6990701735961690e-15, -1.2016747182072786e-15, 3.4853578307652490e-15, 1.6155603827747878e-14, 3.4575031498911003e-14, 1.1646460740740067e-14, -2.6451614895516238e-13, -6.7812992927736126e-13, 4.9486297748301490e-12, -1.8043219231897870e-11], [1.3906748286697827e-18, 1.0925249884034011e-17, 2.1233995724247275e-17, 1.4626529935228498e-17, -2.7608660328548649e-17, -7.4937013729496597e-17, 1.5395573100478898e-16, 1.6519937902650477e-15, 4.4045016938439317e-15, -1.5201094882753641e-14, 3.5350613338461821e-14, -2.4695325427013996e-13], [1.4850581528022996e-20, 1.6636482940710663e-19, 6.4036246845046072e-19, 1.7340611468339996e-18, 3.6169691044913558e-18, 5.4229640594633705e-18, 3.6085749818446953e-18, -7.6895243576914390e-19, 8.1491525342268903e-17, 3.3656504798269331e-16, -1.7022899668066060e-15, 2.5370008318142817e-15], [7.4336006075783068e-22, 6.5175726950214028e-21, 1.7480158234687246e-20, 3.4597336730047481e-20, 6.7076145512791116e-20, 1.4516607427631217e-19, 3.0553827185907878e-19, 3.1873299605729464e-19, -6.9716337601794417e-19, 8.4235849726088822e-18, -4.3305828426552052e-17, 2.4998469645113691e-16], [4.7991269762101512e-24, 4.7909783593079203e-23, 1.5276113580913812e-22, 3.1986228939571769e-22, 4.4808351554151088e-22, 3.2141918009431878e-22, 5.2394900063414680e-22, 5.3389015715338212e-21, -5.6834605848150531e-21, -1.2275159860835598e-19, 1.6377996183877980e-19, 6.6631168329942658e-18], [-2.8098262258893968e-25, -2.6878880021610523e-24, -8.2878224530097902e-24, -1.8397963238969939e-23, -3.5033902643433410e-23, -6.5811138888953847e-23, -1.4547272340632031e-22, -3.1973962670889891e-22, -1.5884325490976672e-22, -4.8160411710006645e-21, 2.3160800983556078e-20, 5.0075929003510048e-20], [-1.2413262082336579e-26, -1.1463969672004155e-25, -3.3781396179000140e-25, -7.3366041972537902e-25, -1.4050491738423467e-24, -2.4851978698715373e-24, -4.1712123641884158e-24, -8.6528764298499596e-24, -1.8559914579701172e-23, 9.3385299866744162e-24, 2.2433205756962704e-22, -2.6259489803764053e-21]],
        [[1.7460962098810052e-3, 1.5967241605514196e-2, 4.5825397174357508e-2, 9.4523049905179889e-2, 1.6798263014269458e-1, 2.7689821500643929e-1, 4.4142156442170990e-1, 7.0306630600045731e-1, 1.1603654806748491e+0, 2.1059123274462165e+0, 4.8248253341699225e+0, 23.183755085265521e+0], [-5.8122152102813364e-5, -5.3673871244251614e-4, -1.5715705005276266e-3, -3.3440147837724954e-3, -6.2076267230100691e-3, -1.0846620623915482e-2, -1.8662143327404631e-2, -3.2826518891480751e-2, -6.1686005965644313e-2, -1.3281835956108126e-1, -3.7981861811605476e-1, -2.3267270822763211e+0], [7.2350051637901361e-7, 6.7278681533465057e-6, 1.9978279331591792e-5, 4.3435482941329463e-5, 8.3046292396720985e-5, 1.5074836811518215e-4, 2.7195557026129068e-4, 5.0628044261034150e-4, 1.0141427282046975e-3, 2.3203950496880390e-3, 6.7592551859705192e-3, 3.6340389568119166e-2], [-8.0539748278421967e-9, -7.4969134893139331e-8, -2.2300980487327965e-7, -4.8578411217322484e-7, -9.2962795462148887e-7, -1.6833141346125721e-6, -3.0042971977345605e-6, -5.4277867230928923e-6, -1.0069806834006360e-5, -1.8741330027270584e-5, -2.7334247213836922e-5, 2.8227758807431690e-5], [8.2159414862161741e-11, 7.5860120535744068e-10, 2.2172288892156842e-9, 4.6848035848084342e-9, 8.5257745558549827e-9, 1.4187143492530578e-8, 2.1722222167284171e-8, 2.8222938153307727e-8, 1.4836691973153174e-8, -1.1723515678423513e-7, -7.3958352485483093e-7, -4.9667484455732328e-7], [-8.5483188355006198e-13, -7.7378618454213427e-12, -2.1636221216397407e-11, -4.2157681807056748e-11, -6.6129499807973828e-11, -8.0456642160547533e-11, -3.9404572659844239e-11, 2.0701893339373846e-10, 1.1031592426129919e-9, 3.2348978823560075e-9, -3.0001416750278068e-9, -4.0289280032360653e-8], [7.8172372797622245e-15, 6.8087885193672723e-14, 1.7353986940372078e-13, 2.7681311900930518e-13, 2.4881628297546957e-13, -2.4290834020372030e-13, -1.9891863313603285e-12, -6.4110417306210159e-12, -1.1943381862524377e-11, 2.4312843542377607e-11, 2.5101350536279153e-10, -1.2927264188345991e-9], [-4.5471884364484654e-17, -3.4036751903299135e-16, -5.1246223425395287e-16, 5.3818042552625867e-16, 5.2004865258027540e-15, 1.7953688730004166e-14, 4.3827401826333355e-14, 6.6650928374055172e-14, -8.2784130149315209e-14, -9.2013357837993782e-13, 4.7996921822868012e-12, -2.1965789372211579e-11], [2.4563828334894911e-18, 2.1595110387291124e-17, 5.6914765489555937e-17, 1.0188427314026482e-16, 1.4904916961859952e-16, 2.1608253233799567e-16, 4.8462211657768754e-16, 1.8574117350937179e-15, 6.7293520924873864e-15, 1.0936262171111855e-15, -5.2236718916928100e-14, 9.6397728014791760e-14], [4.2234528392336677e-20, 4.0722980925624000e-19, 1.2863773380048071e-18, 2.9875936035041070e-18, 5.9118837226992021e-18, 1.0079607951678343e-17, 1.3406056750969347e-17, 1.0556339279477341e-17, 4.2808814692404582e-17, 5.0268765669402766e-16, -2.9457944039906361e-15, 1.8379257469209091e-14], [3.9467732795319334e-22, 3.3604681499276013e-21, 8.3324706956416625e-21, 1.3944856665970623e-20, 2.0931538263952865e-20, 3.9465205054244235e-20, 9.2353226533338349e-20, 5.8813615261632033e-20, -1.4638623402015536e-18, -1.4630259215048984e-18, -1.0584776661158130e-17, 5.1789565211427355e-16], [-2.7061383205096282e-23, -2.5044524034685980e-22, -7.4079577998368459e-22, -1.6250749556929253e-21, -3.2267072110569848e-21, -6.2935590437871415e-21, -1.2074944818470709e-20, -2.0397481172923119e-20, -3.6448390538908281e-20, -3.0398957590480988e-19, 1.2678993431072294e-18, 3.0595346350313688e-18], [-1.0707597113935302e-24, -9.9552047500420414e-24, -2.9478852363679078e-23, -6.3452644983971325e-23, -1.1868351047096670e-22, -2.0888333850108075e-22, -3.7258181004909635e-22, -7.1493506613819022e-22, -1.0403318740463612e-21, -1.9966352869980964e-21, 1.5860716930613984e-20, -2.5790112836680207e-19], [-1.4760024227543378e-26, -1.3492361026368051e-25, -3.8745940148548285e-25, -8.0160362898548063e-25, -1.4271487176716607e-24, -2.2974072774953748e-24, -3.2412800267588056e-24, -4.1001805109219401e-24, -8.7898123151101443e-24, 9.3734560594699373e-23, -5.6196470531528414e-22, -9.0625623452575066e-21]],
        [[1.6353488176552084e-3, 1.4944876554087604e-2, 4.2834012985138722e-2, 8.8164903156385763e-2, 1.5619799336659157e-1, 2.5634963734423209e-1, 4.0616288095511869e-1, 6.4126285011186742e-1, 1.0447278468913132e+0, 1.8581074342097134e+0, 4.1180798987876623e+0, 18.821953463298686e+0], [-5.2699625955406344e-5, -4.8631914063702421e-4, -1.4218770743292540e-3, -3.0186359687643490e-3, -5.5856576299259331e-3, -9.7176972858841982e-3, -1.6624871114256308e-2, -2.9028868463761948e-2, -5.4050605755537135e-2, -1.1518159042706369e-1, -3.2726001217878743e-1, -2.0348573016901408e+0], [6.3420819545828358e-7, 5.8962397800671561e-6, 1.7501465567990212e-5, 3.8029192672350340e-5, 7.2666800930234974e-5, 1.3185694704271946e-4, 2.3795615632012600e-4, 4.4396799020909912e-4, 8.9540593579993701e-4, 2.0864589304836082e-3, 6.3594383036723587e-3, 3.6598854169206627e-2], [-6.8662582188664508e-9, -6.3982445059258285e-8, -1.9077026325174805e-7, -4.1719849190041547e-7, -8.0341011247737830e-7, -1.4693204056606422e-6, -2.6651857920956500e-6, -4.9506970928731589e-6, -9.6718252305538943e-6, -2.0076288548689655e-5, -3.9279250849855828e-5, 1.1955370152427960e-5], [6.6887808809627375e-11, 6.1987533016150460e-10, 1.8262388207926736e-9, 3.9116311896930031e-9, 7.2783082313523184e-9, 1.2565878967051766e-8, 2.0567067772591445e-8, 3.1011918377623530e-8, 3.3975741172272371e-8, -4.8701203579641451e-8, -7.2985083525031451e-7, -1.6576102727634299e-6], [-6.7217645696981493e-13, -6.1262567382861905e-12, -1.7394634030401021e-11, -3.4866226091823829e-11, -5.7678014582745418e-11, -7.9143344682975083e-11, -7.0227025854182427e-11, 8.2577547492307215e-11, 8.1396148852386182e-10, 3.5288454667090393e-9, 4.3499586772144687e-9, -7.7590875045306475e-8], [7.8764227624093147e-15, 7.0451072730605646e-14, 1.9160663050080154e-13, 3.5336690462013288e-13, 4.9221119910482134e-13, 4.0925873908101954e-13, -4.7491384944411380e-13, -3.6655329700496990e-12, -1.1118103224110578e-11, 1.5225323222639308e-12, 3.4615412140675573e-10, -1.7364624954125311e-9], [5.7176908011933027e-17, 5.8034671209487144e-16, 2.0229531577710268e-15, 5.4284860910931127e-15, 1.3150221987028378e-14, 3.0247414816357614e-14, 6.6399539604922105e-14, 1.3024912608200963e-13, 1.4186904553048224e-13, -6.3396292160416763e-13, 1.4671021725274521e-12, -4.3227283037461066e-12], [3.8198107239430845e-18, 3.4588841656390532e-17, 9.7151954899190617e-17, 1.9322505994479242e-16, 3.2599094958805334e-16, 5.1153168491713704e-16, 8.5509053587495824e-16, 1.9696561536752236e-15, 6.6926406730983017e-15, 1.4796944472036933e-14, -1.5134744284999327e-13, 1.1173347870914413e-12], [1.6967950458050186e-20, 1.6145897240654733e-19, 4.9724845193232639e-19, 1.1102593661476980e-18, 2.0484348482132907e-18, 2.8961428771237015e-18, 9.0254533433222150e-19, -1.5283099575857398e-17, -6.2750525020916354e-17, 1.6778118557513649e-16, -2.1582487801715170e-15, 3.6398206357466390e-14], [-2.1146043017066032e-21, -1.9869332460436951e-20, -6.0147376754390952e-20, -1.3399658743222938e-19, -2.6204584112929113e-19, -4.8019375381950557e-19, -8.5390948471986448e-19, -1.5897807829656528e-18, -4.1503298750700603e-18, -1.4993417293099357e-17, 4.8787093764404060e-17, 2.0867669609257505e-16], [-8.8450070755534085e-23, -8.1776293124952538e-22, -2.4014274695491763e-21, -5.1410158931904291e-21, -9.6560460092274463e-21, -1.7210747027893740e-20, -3.0292408365027474e-20, -5.2242044451651381e-20, -8.0583886729768182e-20, -2.6285410469100000e-19, 1.0990291173694735e-18, -2.0655282471106448e-17], [-1.2087032713742221e-24, -1.1089704955234625e-23, -3.1982379951981897e-23, -6.6118163778654695e-23, -1.1654018936558867e-22, -1.8623376557529472e-22, -2.7839690115999196e-22, -4.0581539957818333e-22, -3.6872029782732722e-22, 4.0290400851513571e-21, -2.4378166803224496e-20, -6.8039456277226522e-19], [1.8180659817624653e-26, 1.7179863506389959e-25, 5.2625126515362445e-25, 1.1961929243739735e-24, 2.4214303549452043e-24, 4.7280939009136125e-24, 9.4290339698309524e-24, 1.9974336998819355e-23, 4.1085276960877967e-23, 1.3239825545760230e-22, -7.0180178658048850e-22, -2.8175649783599273e-21]],
        [[1.5347745267127734e-3, 1.4017090133803198e-2, 4.0123355595498182e-2, 8.2416729387301463e-2, 1.4557882562855362e-1, 2.3791560065600636e-1, 3.7471938893596425e-1, 5.8657475212859665e-1, 9.4342963817696598e-1, 1.6436672033567879e+0, 3.5128088605807319e+0, 15.045078807217699e+0], [-4.7938298566599902e-5, -4.4206045211660722e-4, -1.2905502806155315e-3, -2.7334136863519487e-3, -5.0409900005705195e-3, -8.7300664363573240e-3, -1.4843663950826860e-2, -2.5706221659112437e-2, -4.7341213107279532e-2, -9.9461476758125681e-2, -2.7845885805666126e-1, -1.7420759846065725e+0], [5.5782604670988943e-7, 5.1842332533003849e-6, 1.5376938110956033e-5, 3.3376979867201605e-5, 6.3689002041988661e-5, 1.1538178705093623e-4, 2.0790186570855262e-4, 3.8757945911055758e-4, 7.8310061069015797e-4, 1.8431895147002913e-3, 5.8223674913150509e-3, 3.6524739963894103e-2], [-5.8925379345073748e-9, -5.4944997410687501e-8, -1.6405814425233526e-7, -3.5966593173084454e-7, -6.9539743247896437e-7, -1.2800747438672417e-6, -2.3472830294782102e-6, -4.4447174641573812e-6, -9.0107308969122983e-6, -2.0293952935614757e-5, -4.9806136643385288e-5, -2.9198092648957553e-5], [5.5535298040581272e-11, 5.1621784782445703e-10, 1.5307273732559351e-9, 3.3150217373557985e-9, 6.2787505714293402e-9, 1.1159196151215181e-8, 1.9214174000892163e-8, 3.2111830140208594e-8, 4.8019872301735080e-8, 2.1086841775730299e-8, -5.5952500739144851e-7, -3.6099271029316343e-6], [-4.5034205062142904e-13, -4.1173625092780180e-12, -1.1770654396987583e-11, -2.3874599487689559e-11, -4.0293900216894294e-11, -5.7383383287569813e-11, -5.6495913981403910e-11, 4.4428652516301788e-11, 6.1559079062529031e-10, 3.4068410895470363e-9, 1.2546904649485530e-8, -1.1546438469577987e-7], [1.1115890427449903e-14, 1.0153160231773382e-13, 2.8984980979145261e-13, 5.8778291989469934e-13, 9.9794034952578156e-13, 1.4654583177256314e-12, 1.7093935154675977e-12, 6.6673759631532644e-13, -4.7555389751342934e-12, -9.6263891290909546e-12, 3.1086278929086827e-10, -1.1615620704983470e-9], [1.6444678186790472e-16, 1.5491188996735963e-15, 4.7264411689417072e-15, 1.0732325871311344e-14, 2.1836730152015326e-14, 4.2990657337121911e-14, 8.4946506766752174e-14, 1.6756134214764054e-13, 2.8099978440573948e-13, -1.9773044433711106e-13, -4.1725469469510110e-12, 5.1664033508587819e-11], [1.8571410624442158e-18, 1.6394621759047249e-17, 4.3364767746093295e-17, 7.6352948827181794e-17, 9.8895059039809852e-17, 7.3400733192819013e-17, -6.5663086263350966e-17, -2.9422112570094074e-16, 6.1758048735465636e-16, 7.9638527791969687e-15, -1.8607343741019351e-13, 2.2738587653179929e-12], [-1.5624786498111497e-19, -1.4508440359874765e-18, -4.2970574503947918e-18, -9.3168227773053316e-18, -1.7812450561255007e-17, -3.2658410025706355e-17, -6.1151704062887865e-17, -1.2525439530765934e-16, -2.9431036074287348e-16, -5.8002565486698933e-16, 3.3332415159351136e-16, 1.7482681333682282e-14], [-6.5785571881377655e-21, -6.0980913048032269e-20, -1.7985721811668870e-19, -3.8655312355667366e-19, -7.2542767303219408e-19, -1.2772002966111975e-18, -2.1881484777700689e-18, -3.7455177302425379e-18, -6.9596721778005466e-18, -1.9638495871585866e-17, 6.4647430546391759e-17, -1.3369050550086937e-15], [-8.8542060366272929e-23, -8.0985207708047533e-22, -2.3235325620750602e-21, -4.7807009514701927e-21, -8.4292712377339564e-21, -1.3620110709668109e-20, -2.0622810201920317e-20, -2.7578675687351991e-20, -1.2405515318335564e-20, 1.1946874197141164e-19, -3.5421005123855692e-19, -4.4188081927479844e-17], [2.1269913509588307e-24, 1.9933501902840028e-23, 6.0143068986259765e-23, 1.3405620690138243e-22, 2.6547601811863323e-22, 5.0497874698204278e-22, 9.6530600133797814e-22, 1.9089648327104630e-21, 4.0396214564786540e-21, 1.2666325039831751e-20, -2.0089294012979064e-20, 1.7642168075990877e-20], [1.2495018975039098e-25, 1.1575344435435709e-24, 3.4102579206144650e-24, 7.3206359339422877e-24, 1.3736533212143386e-23, 2.4281980377288614e-23, 4.2242518328508447e-23, 7.4881816113814730e-23, 1.3688614577699992e-22, 2.2207793531538997e-22, 1.1076653039692244e-21, 3.2959248327726912e-20]],
        [[1.4431468972225168e-3, 1.3172450761347526e-2, 3.7659320120152988e-2, 7.7203866557607462e-2, 1.3598110363766192e-1, 2.2133197334230768e-1, 3.4660972321234284e-1, 5.3810026342156898e-1, 8.5467942824234330e-1, 1.4587260016731019e+0, 3.0004841042765805e+0, 11.851202084420169e+0], [-4.3744008785114163e-5, -4.0308885806315431e-4, -1.1750084176902223e-3, -2.4827909256776737e-3, -4.5632010075019519e-3, -7.8654932418172691e-3, -1.3287959858870498e-2, -2.2810117201943781e-2, -4.1494953539044464e-2, -8.5679246170890690e-2, -2.3440134392753133e-1, -1.4524437647187303e+0], [4.9220109278453431e-7, 4.5722027680846623e-6, 1.3548770599371923e-5, 2.9366236564471064e-5, 5.5925177006780069e-5, 1.0106158212650821e-4, 1.8155109333044025e-4, 3.3736189960218390e-4, 6.7997504511182823e-4, 1.6038897331579321e-3, 5.1804364652862964e-3, 3.5748404479809152e-2], [-5.0599319954448793e-9, -4.7196872550806937e-8, -1.4102637848312283e-7, -3.0957699007082001e-7, -5.9987847277849900e-7, -1.1084014769691537e-6, -2.0458943223980324e-6, -3.9214378526309548e-6, -8.1475482737514735e-6, -1.9425682828732028e-5, -5.6397184836267932e-5, -1.0630303147815983e-4], [4.9574804793752321e-11, 4.6178760619317612e-10, 1.3756087809637977e-9, 3.0026374679592979e-9, 5.7604673261774692e-9, 1.0456156698561639e-8, 1.8675026426972381e-8, 3.3513427296177451e-8, 5.9790810563809107e-8, 8.6513557696099439e-8, -2.4681144104129680e-7, -6.0374895982725109e-6], [-1.2874404640058958e-13, -1.1671782092514666e-12, -3.2655312476418508e-12, -6.3094399317549140e-12, -9.4534269159139304e-12, -8.9590982236783725e-12, 1.0172352857074331e-11, 1.1044697460546927e-10, 5.8644923031066206e-10, 3.1139319330032751e-9, 1.7960804686944017e-8, -1.1763775414679467e-7], [1.5314123117227814e-14, 1.4076617650161162e-13, 4.0768268291997992e-13, 8.4924453003324558e-13, 1.5147603720286668e-12, 2.4512480108572250e-12, 3.6023799224380181e-12, 4.3395308658308721e-12, 1.4287972745353136e-12, -1.5694992814435989e-11, 1.1581713953229023e-10, 1.3040168348273530e-9], [7.8383116047290842e-17, 7.2476124202372694e-16, 2.1317269394685517e-15, 4.5917544373871122e-15, 8.7613602916346131e-15, 1.6136020287864865e-14, 3.0137996045339808e-14, 5.6967645321742247e-14, 8.1017436215360480e-14, -4.0575781506363582e-13, -9.4727590149337785e-12, 1.2067494450052247e-10], [-8.9648917051641314e-18, -8.3870979440658371e-17, -2.5216024836627778e-16, -5.5891148980277708e-16, -1.0976644224998719e-15, -2.0623401077455279e-15, -3.8699161509687556e-15, -7.4296868984937153e-15, -1.4389441168455887e-14, -2.3826355584841631e-14, -1.3192791186756107e-13, 1.5265984582009507e-12], [-4.3863275822017190e-19, -4.0563184790758197e-18, -1.1908362749479305e-17, -2.5429218328539891e-17, -4.7395839362294551e-17, -8.3163187564306308e-17, -1.4384724668800657e-16, -2.5610612412313291e-16, -4.9738928989593910e-16, -1.0355512557175195e-15, 2.5952094710405810e-15, -6.7406753291303836e-14], [-5.2783928953555988e-21, -4.8282955303776459e-20, -1.3848377620725611e-19, -2.8432609506918423e-19, -4.9753772395317435e-19, -7.8629627661977976e-19, -1.1218163420100347e-18, -1.2881813907674102e-18, -2.9067698730589968e-19, 3.5979160433563305e-18, 5.5736836454177798e-17, -2.5319723530987277e-15], [2.2592093659730420e-22, 2.1099232769524498e-21, 6.3200545319431355e-21, 1.3923232961010838e-20, 2.7100953455122115e-20, 5.0329871769486989e-20, 9.3411294373202293e-20, 1.8054651963646741e-19, 3.8692403620252276e-19, 1.0420982368177948e-18, 6.5622738698407988e-19, 7.4217249011512218e-18], [1.1735266192893054e-23, 1.0864598495819483e-22, 3.1970527085857401e-22, 6.8522358063754012e-22, 1.2836550936883019e-21, 2.2657616029865695e-21, 3.9337055638557422e-21, 6.9305631760188823e-21, 1.2672645057124248e-20, 2.5155326915996265e-20, 6.3546362659787209e-20, 2.1333775422217744e-18], [1.9764499790250238e-25, 1.8176785806239924e-24, 5.2747336142459191e-24, 1.1052032085671287e-23, 2.0010910731579287e-23, 3.3589327143157304e-23, 5.4092280285342919e-23, 8.4840771228338008e-23, 1.2700478324650301e-22, 1.0686576837827515e-22, 1.0860517070223020e-21, 3.0884710361340714e-20]],
        [[1.3594136825088907e-3, 1.2401145435082639e-2, 3.5412597478458221e-2, 7.2462025410649703e-2, 1.2728041231440479e-1, 2.0636937201133870e-1, 3.2141208341060649e-1, 4.9503647822979055e-1, 7.7683178942623482e-1, 1.2994800819806064e+0, 2.5709527509012628e+0, 9.2269958100917326e+0], [-4.0035857724864372e-5, -3.6865165529502104e-4, -1.0730148474629099e-3, -2.2619063766646621e-3, -4.1430283957993171e-3, -7.1073525408762021e-3, -1.1928628266092209e-2, -2.0290130376032943e-2, -3.6429069577318638e-2, -7.3752456106292474e-2, -1.9570424638807433e-1, -1.1733630462873171e+0], [4.3622101374017265e-7, 4.0499979381584122e-6, 1.1988083699629637e-5, 2.5938996156109411e-5, 4.9279809618849605e-5, 8.8769013707491333e-5, 1.5881513598905581e-4, 2.9361323985001395e-4, 5.8833688009977606e-4, 1.3810605491224642e-3, 4.4920553762058364e-3, 3.3824338568301613e-2], [-4.2673975853754228e-9, -3.9811827815462230e-8, -1.1900892080890247e-7, -2.6144082446551368e-7, -5.0725723554944778e-7, -9.3935700708608856e-7, -1.7407959742550752e-6, -3.3619425511006466e-6, -7.0955698883737339e-6, -1.7569527126600442e-5, -5.7418902368068557e-5, -2.1881154365527885e-4], [5.0620462584387784e-11, 4.7170306933239741e-10, 1.4065034684879260e-9, 3.0764906624364653e-9, 5.9273577815660665e-9, 1.0851256790669517e-8, 1.9718476428250584e-8, 3.6718337372511975e-8, 7.1710297060551131e-8, 1.4352560657564064e-7, 1.1668097322008772e-7, -7.7869663749089569e-6], [2.1734959594332438e-13, 2.0095532008283158e-12, 5.9078924465765009e-12, 1.2711230281635840e-11, 2.4241124597517547e-11, 4.4997251000025428e-11, 8.7932521089089363e-11, 1.9849570054331793e-10, 5.8033460528943786e-10, 2.4839174899930722e-9, 1.7184666176982368e-8, -4.3164001263016507e-8], [1.0994718466652658e-14, 1.0042552211016941e-13, 2.8694818761359782e-13, 5.8421876215644150e-13, 1.0037777809299123e-12, 1.5210888602561277e-12, 1.9364286055503596e-12, 1.2697380809434421e-12, -5.2094959004966255e-12, -4.2514477583834308e-11, -1.9080810188454401e-10, 4.8758874234422449e-9], [-4.7138048564222453e-16, -4.3843251037562837e-15, -1.3021218074280623e-14, -2.8295553884036031e-14, -5.3976757286762873e-14, -9.7405386754517610e-14, -1.7358116004894017e-13, -3.1647363991579044e-13, -6.2377699644418071e-13, -1.6265231686630210e-12, -1.1657257232821914e-11, 1.1373698661731790e-10], [-2.4458500686249971e-17, -2.2655312837369770e-16, -6.6737843821800146e-16, -1.4329186266157759e-15, -2.6914269657523999e-15, -4.7680997623307671e-15, -8.3165719596299990e-15, -1.4714245905309981e-14, -2.6721921379074055e-14, -4.4382667847921612e-14, 1.6883402583673440e-14, -2.3474069848091353e-12], [-2.6205892403683831e-19, -2.3850854461099926e-18, -6.7672143558740712e-18, -1.3641750418662328e-17, -2.3187013704415114e-17, -3.4994692494660401e-17, -4.6246027440392383e-17, -4.5282538338082429e-17, 1.2885119016818611e-17, 3.4965819963769738e-16, 6.2723186746996376e-15, -1.2953715140836645e-13], [1.8824435473540408e-20, 1.7535137454841462e-19, 5.2254718118475859e-19, 1.1424229733890461e-18, 2.2018236436773389e-18, 4.0423958716418101e-18, 7.4141867745520788e-18, 1.4164111855142704e-17, 2.9621066826313769e-17, 7.1226832328753184e-17, 1.4189393088763254e-16, 2.0111145715620818e-16], [8.4017063662642090e-22, 7.7729971810739393e-21, 2.2839704275459450e-20, 4.8833994331322451e-20, 9.1140318929746741e-20, 1.5994792366428170e-19, 2.7525409481966679e-19, 4.7891295310991461e-19, 8.6689910359380427e-19, 1.7059063885479658e-18, 2.1612535467029850e-18, 1.0932330223575312e-16], [6.7479803865013736e-24, 6.1323270650618169e-23, 1.7342293327885894e-22, 3.4757688773059043e-22, 5.8478911990707596e-22, 8.6488433401559161e-22, 1.0832557759403086e-21, 7.9868418572616793e-22, -1.9905395802755003e-21, -1.8608991071725258e-20, -8.1410846403568207e-20, 1.1574803550954591e-18], [-6.3211057770362032e-25, -5.8817371859128671e-24, -1.7489259514756675e-23, -3.8110229178418145e-23, -7.3125525833061823e-23, -1.3348885661697287e-22, -2.4302686263095557e-22, -4.5950648887295800e-22, -9.4672823979454608e-22, -2.3065825074145589e-21, -7.8947847809829398e-21, -7.4702150099974079e-20]],
        [[1.2826795521011197e-3, 1.1694822212019274e-2, 3.3358227130838272e-2, 6.8136395369933068e-2, 1.1937048393785100e-1, 1.9283125655527329e-1, 2.9876307580186276e-1, 4.5668461377761755e-1, 7.0842501373184542e-1, 1.1623857779148364e+0, 2.2133370593732795e+0, 7.1410400575397898e+0], [-3.6736761347953513e-5, -3.3803069974968094e-4, -9.8242942246349042e-4, -2.0660842153213801e-3, -3.7714839483545714e-3, -6.4392626175620833e-3, -1.0736162292161982e-2, -1.8092316614348634e-2, -3.2042654955577601e-2, -6.3504942100385418e-2, -1.6246820527508362e-1, -9.1540907685131886e-1], [3.9004549417201448e-7, 3.6191394699494505e-6, 1.0699666341393514e-5, 2.3106941227253349e-5, 4.3780156105513015e-5, 7.8571287777395900e-5, 1.3987896157180873e-4, 2.5692077390316466e-4, 5.1041503543805795e-4, 1.1854159892381951e-3, 3.8244718948654024e-3, 3.0445633974396480e-2], [-3.4144820931189960e-9, -3.1868980669625695e-8, -9.5353878102534980e-8, -2.0978583448491668e-7, -4.0792332607390508e-7, -7.5779259839400508e-7, -1.4108946179582521e-6, -2.7449772705548501e-6, -5.8697220795271547e-6, -1.4949134194115954e-5, -5.3158073628375198e-5, -3.4307374931251809e-4], [5.6067783269700886e-11, 5.2171231672092667e-10, 1.5512529431363714e-9, 3.3795346316899388e-9, 6.4799356575765133e-9, 1.1806453333353302e-8, 2.1395542582005172e-8, 4.0011251051227807e-8, 8.0189725234097511e-8, 1.7861313394399688e-7, 3.8949377061734477e-7, -7.2832503730570181e-6], [2.3268089404503258e-13, 2.1131581022208471e-12, 5.9742873793627112e-12, 1.2009361063178221e-11, 2.0492861075351638e-11, 3.1821066848970701e-11, 4.7088706571274291e-11, 7.2801080533618849e-11, 1.5938535323526256e-10, 7.9090808651280154e-10, 8.9996553626160875e-9, 9.9573121114182303e-8], [-1.3124050953482468e-14, -1.2321311651124800e-13, -3.7314335919449150e-13, -8.3680392579354943e-13, -1.6728883733544876e-12, -3.2315876109310354e-12, -6.3603167117841297e-12, -1.3425817919782268e-11, -3.2560752131374349e-11, -1.0144403802081529e-10, -4.6744181724379425e-10, 6.3754571927420123e-9], [-1.1882122863412161e-15, -1.0994169857421093e-14, -3.2309286436310106e-14, -6.9081493399484464e-14, -1.2886677688156264e-13, -2.2578386878990029e-13, -3.8692541638420222e-13, -6.6666427697363900e-13, -1.1788747760253680e-12, -2.1854699664795030e-12, -6.3592091727749749e-12, -2.4698157701732305e-11], [-1.1784736586194583e-17, -1.0720865728925076e-16, -3.0391426151092133e-16, -6.1183551989832552e-16, -1.0379144579288119e-15, -1.5604876756134093e-15, -2.0341601030048233e-15, -1.7967918628582422e-15, 2.3419800607115511e-15, 3.1324564011452964e-14, 3.4504383737750790e-13, -5.6750451120008377e-12], [1.1510695819897251e-18, 1.0714917203013524e-17, 3.1885188206832223e-17, 6.9552974819383282e-17, 1.3361044333497813e-16, 2.4410535522929447e-16, 4.4423037374081143e-16, 8.3661426385507311e-16, 1.6988983101977647e-15, 3.9002885653952095e-15, 1.1027388573496053e-14, -2.5071465787053438e-14], [4.4447427790187911e-20, 4.1068088511316512e-19, 1.2034469987788958e-18, 2.5617987379822682e-18, 4.7497975683115449e-18, 8.2562264706389921e-18, 1.4010024520400800e-17, 2.3857607748532707e-17, 4.1544135983758667e-17, 7.2035290101145266e-17, -1.3856119848109496e-17, 4.6149497785077183e-15], [-2.1100685630025866e-22, -2.0385887914696164e-21, -6.5199909177411262e-21, -1.5770028173694562e-20, -3.4512251888297817e-20, -7.3566641371105786e-20, -1.5979938153673571e-19, -3.6861778176270046e-19, -9.5215387822286964e-19, -2.9863830737042139e-18, -1.2530477644702642e-17, 5.4111520738588278e-17], [-5.7837630646928180e-23, -5.3702935666883500e-22, -1.5898491718329785e-21, -3.4403897291520024e-21, -6.5354922561986334e-21, -1.1764392627500392e-20, -2.1003462409284066e-20, -3.8621478170978896e-20, -7.6332675615600621e-20, -1.7246811923777554e-19, -4.4762313303015320e-19, -3.3103622636520715e-18], [-1.3136587051620805e-24, -1.2118676803640770e-23, -3.5394455112299152e-23, -7.4935048419525440e-23, -1.3778123849515450e-22, -2.3645930089909534e-22, -3.9311286658641930e-22, -6.4524100928680406e-22, -1.0348602259449434e-21, -1.3393803973001256e-21, 2.8520961248474117e-21, -5.7791986382600918e-20]],
        [[1.1927377660855709e-3, 1.0867641951806591e-2, 3.0956644200645551e-2, 6.3094039446842863e-2, 1.1018782259970949e-1, 1.7720507518846593e-1, 2.7282954684664277e-1, 4.1326690336920111e-1, 6.3226818645630413e-1, 1.0137488835923242e+0, 1.8434633126458627e+0, 5.1803701638915175e+0], [-5.2695673793711613e-5, -4.8442957438821171e-4, -1.4052367634483397e-3, -2.9463446545353553e-3, -5.3548209374866105e-3, -9.0866298568059864e-3, -1.5020886190602763e-2, -2.5006419098307281e-2, -4.3494803677079185e-2, -8.3741269550807530e-2, -2.0313933503820752e-1, -1.0118195275361821e+0], [8.8644027599402503e-7, 8.2180197148187998e-6, 2.4252960581682892e-5, 5.2230681785491022e-5, 9.8564668697364913e-5, 1.7591578850249436e-4, 3.1081916170955050e-4, 5.6496859889583405e-4, 1.1059831131737111e-3, 2.5137274349034705e-3, 7.8546073788063365e-3, 6.1714115910842817e-2], [-9.2585674778207803e-9, -8.6611518829075858e-8, -2.6034020325767653e-7, -5.7679502590980807e-7, -1.1323595155829841e-6, -2.1298835523834863e-6, -4.0286211977462852e-6, -7.9973553534828270e-6, -1.7566166028168246e-5, -4.6589560764618062e-5, -1.8049255867525609e-4, -1.8414499343126198e-3], [3.3168952259200216e-10, 3.0775516243193494e-9, 9.0979568052097778e-9, 1.9646828784358024e-8, 3.7223977412714038e-8, 6.6808679798785694e-8, 1.1894111845626077e-7, 2.1833359433682752e-7, 4.3205717290988986e-7, 9.8283304123464614e-7, 2.7671978566546468e-6, -1.6411948690918535e-5], [-8.3993370002885952e-12, -7.8504733567868549e-11, -2.3550398574610996e-10, -5.1987999977797824e-10, -1.0142571257804766e-9, -1.8874214167294054e-9, -3.5039389307709179e-9, -6.7218472969784798e-9, -1.3780541436887341e-8, -3.0850379341769880e-8, -5.7065566927696377e-8, 2.5141637260164525e-6], [-7.6418416369693072e-13, -7.0686779463287375e-12, -2.0763206598685489e-11, -4.4377396016463315e-11, -8.2810494407940909e-11, -1.4544209665589106e-10, -2.5117531328393572e-10, -4.4198431443830943e-10, -8.2701196197922329e-10, -1.7818452353495058e-9, -5.5820366512314820e-9, 2.7048121233435835e-8], [-1.1983686331302672e-15, -8.3093885844023372e-15, -7.4072813427167574e-15, 4.2739860885811044e-14, 2.4182080956197178e-13, 8.3682174767611924e-13, 2.4855479029199465e-12, 7.1494755269638845e-12, 2.1752644233265337e-11, 7.7910720813047964e-11, 3.8348101770074501e-10, -5.4407426165381992e-9], [2.8421750008604305e-15, 2.6374478701163211e-14, 7.7980370748574286e-14, 1.6837213744234317e-13, 3.1868539796949499e-13, 5.7029321966171896e-13, 1.0083466425574753e-12, 1.8236371934980372e-12, 3.4967730086245563e-12, 7.4403642810226155e-12, 1.9079331504221271e-11, -5.5800209356302879e-11], [7.6546943130700274e-17, 7.0111213313305578e-16, 2.0166734720341200e-15, 4.1617518320687783e-15, 7.3498104620683843e-15, 1.1830238869315692e-14, 1.7633186509551895e-14, 2.3254859102081439e-14, 1.8434140724356770e-14, -6.6727055201733363e-14, -9.6313673698327677e-13, 1.2300164147629832e-11], [-7.9237323335614722e-18, -7.3827004263932574e-17, -2.2010458407867302e-16, -4.8152871631465647e-16, -9.2881764735959403e-16, -1.7063903057453455e-15, -3.1286551980794442e-15, -5.9546817263997835e-15, -1.2302374134301046e-14, -2.9332381222228048e-14, -8.5657723055114516e-14, 1.3948870343303985e-13], [-4.6931434834976434e-19, -4.3342014047079247e-18, -1.2687036048467436e-17, -2.6954850195291226e-17, -4.9811376875885545e-17, -8.6084913801298046e-17, -1.4452276461440531e-16, -2.4072927898953832e-16, -3.9683916390796187e-16, -5.6570030239158351e-16, 9.9621104143655261e-16, -2.5882393380368419e-14], [1.4940524817961999e-20, 1.4028245097182383e-19, 4.2484833301833946e-19, 9.5225442847657625e-19, 1.8998481116423779e-18, 3.6504724579449781e-18, 7.0972408858945615e-18, 1.4590626760718488e-17, 3.3478218838710536e-17, 9.3200134628038777e-17, 3.5533166780407518e-16, -3.8525863291562659e-16], [2.0115599014975915e-21, 1.8656853469535488e-20, 5.5103344237014304e-20, 1.1878197076905027e-19, 2.2430760760771539e-19, 4.0014073227774197e-19, 7.0432079147854566e-19, 1.2643960324587856e-18, 2.3851556512448486e-18, 4.7847305118485541e-18, 6.9664440334244387e-18, 4.4014666345902515e-17]],
        [[1.0941377374281695e-3, 9.9617143113351619e-3, 2.8331713971736663e-2, 5.7600320357849299e-2, 1.0022941534556849e-1, 1.6036848055665457e-1, 2.4513945372697208e-1, 3.6750322168215330e-1, 5.5352479306816816e-1, 8.6475726236790968e-1, 1.4936200059738155e+0, 3.5798264156885745e+0], [-4.5976858020022197e-5, -4.2217802958155924e-4, -1.2217476357277938e-3, -2.5519597965787670e-3, -4.6126779125532682e-3, -7.7672760595637753e-3, -1.2702428697281548e-2, -2.0824319565224488e-2, -3.5398678134623827e-2, -6.5657098752457895e-2, -1.4832630536261855e-1, -6.0716333160720130e-1], [7.9883964914070867e-7, 7.3965229319365668e-6, 2.1771562159159113e-5, 4.6692809334201496e-5, 8.7587577388874248e-5, 1.5502181324964345e-4, 2.7073967114492860e-4, 4.8411372092342351e-4, 9.2513688972693911e-4, 2.0240886326052499e-3, 5.9048015328350824e-3, 3.9675856599604342e-2], [-6.1125634629491228e-9, -5.7462064885322786e-8, -1.7440356476366788e-7, -3.9195811644349982e-7, -7.8391717650006808e-7, -1.5079698712039541e-6, -2.9267748914643868e-6, -5.9773218628891880e-6, -1.3529630120318327e-5, -3.7004136411794789e-5, -1.4832474816843357e-4, -1.7167590367209840e-3], [3.1503580740248993e-11, 2.9111920393504332e-10, 8.5472380471195053e-10, 1.8334691828730548e-9, 3.4719075444593825e-9, 6.3361097763184916e-9, 1.1901481961552676e-8, 2.4706161444708900e-8, 6.2167252259621637e-8, 2.1614999682287935e-7, 1.3127681330992111e-6, 2.8675927072584799e-5], [-1.7086078983869491e-11, -1.5794973494992963e-10, -4.6333513687932107e-10, -9.8796301650358931e-10, -1.8363065684254224e-9, -3.2034064018811377e-9, -5.4650339920872829e-9, -9.3861480449926971e-9, -1.6606998880719417e-8, -3.0332361972279589e-8, -4.1525777828071191e-8, 1.5252628587391086e-6], [3.3537208179084468e-13, 3.1627234688293499e-12, 9.6576079357328916e-12, 2.1887624760449315e-11, 4.4205733566390343e-11, 8.5863939162681078e-11, 1.6783653992325708e-10, 3.4264229686177417e-10, 7.6077039779697909e-10, 1.9327085670038882e-9, 5.6238614879313778e-9, -8.8964535332126201e-8], [5.6756499501979703e-14, 5.2461432309202037e-13, 1.5384821279352757e-12, 3.2786458292924226e-12, 6.0875658712649057e-12, 1.0599006164309397e-11, 1.8015838457895811e-11, 3.0721988390444037e-11, 5.3562529009810030e-11, 9.4703826115173808e-11, 1.2581463770853449e-10, -1.2483413500341814e-9], [-1.1952105943972990e-15, -1.1295660073837229e-14, -3.4643781521513962e-14, -7.9054151223978480e-14, -1.6121934041849852e-13, -3.1734422633033598e-13, -6.3178721338526199e-13, -1.3240699961525318e-12, -3.0618104207580284e-12, -8.3797853184088801e-12, -3.0085025394484620e-11, 2.2997490312968490e-10], [-2.0955836549426322e-16, -1.9380653163582379e-15, -5.6898228077503441e-15, -1.2145442565787722e-14, -2.2598747277251350e-14, -3.9440918536605507e-14, -6.7175205847582802e-14, -1.1448819379235387e-13, -1.9733015070591360e-13, -3.2592949771764177e-13, -1.2020007450479261e-13, -1.3406060157828733e-12], [4.6577427220313234e-18, 4.4018824624614328e-17, 1.3501709356901081e-16, 3.0821636026672602e-16, 6.2919061891122978e-16, 1.2410252489768917e-15, 2.4796765092394854e-15, 5.2274515989335323e-15, 1.2194717801134324e-14, 3.3752478981457105e-14, 1.2196295104506403e-13, -5.3486428799531172e-13], [7.6338310831287493e-19, 7.0651435678251321e-18, 2.0772766753107882e-17, 4.4443226038628157e-17, 8.2958871190026700e-17, 1.4539071748846995e-16, 2.4889972457672556e-16, 4.2654993665419763e-16, 7.3706105556288268e-16, 1.1867172662725172e-15, -3.3040051143179294e-16, 1.0321570679584648e-14], [-1.7756742017591388e-20, -1.6789346629351714e-19, -5.1552103306083098e-19, -1.1790362956551124e-18, -2.4141942261052588e-18, -4.7842744738098986e-18, -9.6275896936616341e-18, -2.0510491626965925e-17, -4.8575520519389566e-17, -1.3707967303615689e-16, -4.9457611649551003e-16, 1.2247999941045770e-15], [-2.7815415431182763e-21, -2.5766845696940098e-20, -7.5900735680388704e-20, -1.6286079975477162e-19, -3.0523235357052409e-19, -5.3779152207340111e-19, -9.2679258554096066e-19, -1.6002062295573178e-18, -2.7793290385058704e-18, -4.3778115108284325e-18, 3.8564982835363575e-18, -3.2739280714930612e-17]],
        [[1.0083344837037919e-3, 9.1742734054189003e-3, 2.6055550280436060e-2, 5.2854601636920054e-2, 9.1674168998751685e-2, 1.4601549517717136e-1, 2.2178737921099226e-1, 3.2949813168487348e-1, 4.8961472232181608e-1, 7.4825233903020831e-1, 1.2388092230197623e+0, 2.6242260192090275e+0], [-3.9891981424325932e-5, -3.6587856562721393e-4, -1.0562794654172634e-3, -2.1979286392423923e-3, -3.9508578277418194e-3, -6.6015284329118725e-3, -1.0680030374038026e-2, -1.7241976066768431e-2, -2.8647341899194672e-2, -5.1209448944777519e-2, -1.0786717443255232e-1, -3.6280030119092395e-1], [7.1979165042810401e-7, 6.6545277235402982e-6, 1.9526313638414973e-5, 4.1670090343341750e-5, 7.7606130794069991e-5, 1.3598234805466193e-4, 2.3418921173874565e-4, 4.1053277613984350e-4, 7.6181219444222142e-4, 1.5899777787123066e-3, 4.2463068315187639e-3, 2.2458404321915451e-2], [-7.5093067842008440e-9, -7.0309053264469477e-8, -2.1167175641773443e-7, -4.6987130424477301e-7, -9.2397597836374508e-7, -1.7386294855200755e-6, -3.2805693635838605e-6, -6.4608136851533856e-6, -1.3933801386445101e-5, -3.5564363159614472e-5, -1.2715941157758678e-4, -1.1285838301845665e-3], [-1.4440927592497550e-10, -1.3241068780419479e-9, -3.8168162559406414e-9, -7.9016272697809285e-9, -1.4011930860785394e-8, -2.2663490273614878e-8, -3.3960050093795388e-8, -4.5037367151984590e-8, -3.6266379875074408e-8, 1.2115972287705508e-7, 1.6401421106352629e-6, 3.8681827506850301e-5], [1.1574712924465797e-12, 1.1486281682928803e-11, 3.8454604780061751e-11, 9.8069636405475796e-11, 2.2541422200925019e-10, 4.9819410766804779e-10, 1.0990039095285994e-9, 2.4972295204524456e-9, 6.0555466148889485e-9, 1.6381408780640217e-8, 4.9788229035780461e-8, -3.5417902828023795e-7], [7.5642532850607023e-13, 6.9813448572271658e-12, 2.0408824037533490e-11, 4.3267740007922574e-11, 7.9702857012875692e-11, 1.3712414520495382e-10, 2.2881242946094753e-10, 3.7839734155985606e-10, 6.2208033523362544e-10, 9.4059033267679942e-10, 1.1036704484548291e-11, -4.8957213593223778e-8], [-2.8937277398750705e-14, -2.7053050620785934e-13, -8.1195933197894547e-13, -1.7937614864523365e-12, -3.5031218417894059e-12, -6.5279767770039547e-12, -1.2143722606658984e-11, -2.3382848673750681e-11, -4.8395154972087043e-11, -1.1245001569019792e-10, -2.8881875408165586e-10, 2.7517343351181788e-9], [-1.7419976950087183e-15, -1.5984130311091774e-14, -4.6153520483128592e-14, -9.5864017585840353e-14, -1.7106514425614506e-13, -2.8012528243606902e-13, -4.3111957428743837e-13, -6.1388870270320170e-13, -6.9742561857665091e-13, 2.3456545367941907e-13, 9.5572239835857173e-12, -6.5097824667748038e-12], [1.4991267123531256e-16, 1.3941327751601611e-15, 4.1397987479738209e-15, 8.9968482349633753e-15, 1.7177595773896486e-14, 3.1073357601627402e-14, 5.5630907762921926e-14, 1.0190201572947633e-13, 1.9701212632635000e-13, 4.1182902068367342e-13, 8.2712187811255043e-13, -6.0538188112064713e-12], [1.8074631914347764e-18, 1.6041980685108453e-17, 4.2965418190806475e-17, 7.7467671066328552e-17, 1.0467793571248451e-16, 8.2192572633549099e-17, -1.1432662331694949e-16, -8.7749584161569752e-16, -3.6162414923710911e-15, -1.4492498646657324e-14, -6.8214722929065549e-14, 2.4631319926374922e-13], [-5.7241177477562828e-19, -5.3057092901836623e-18, -1.5647901181353050e-17, -3.3639306493902821e-17, -6.3215806684768101e-17, -1.1179897365276941e-16, -1.9373684706705718e-16, -3.3772188290044541e-16, -5.9994654717590409e-16, -1.0387847734503281e-15, -6.2161696432284024e-16, 6.0205443448458810e-15], [9.8540630934381433e-21, 9.3991219729733727e-20, 2.9345778347876324e-19, 6.8682544381026868e-19, 1.4453267152141177e-18, 2.9485563344138214e-18, 6.0988106866384503e-18, 1.3275666797869643e-17, 3.1694081907094606e-17, 8.7409120894541071e-17, 2.8121763832003157e-16, -8.4982563393668905e-16], [1.7071040281795007e-21, 1.5759952790616646e-20, 4.6089405333687182e-20, 9.7716541101846483e-20, 1.7977777985587624e-19, 3.0785961510238611e-19, 5.0699272374822768e-19, 8.0882959468662615e-19, 1.1887032184643579e-18, 9.5905733440562119e-19, -8.0155495923144653e-18, 1.2982565125343234e-17]],
        [[9.3399998770875677e-4, 8.4928661410962896e-3, 2.4090545722761366e-2, 4.8773002655883173e-2, 8.4356038321316932e-2, 1.3383090141590055e-1, 2.0217159819616566e-1, 2.9804811198129400e-1, 4.3788611354866340e-1, 6.5724358156001502e-1, 1.0525717105037454e+0, 2.0422915158919784e+0], [-3.4526819871221984e-5, -3.1631574976606319e-4, -9.1108071242146233e-4, -1.8888527912267462e-3, -3.3773398693832379e-3, -5.6017093895195839e-3, -8.9702256254496520e-3, -1.4274216976320768e-2, -2.3219285665370571e-2, -4.0135682440048821e-2, -7.9488919960319007e-2, -2.2761523987956018e-1], [6.1888428808522785e-7, 5.7124781073407775e-6, 1.6706748362895295e-5, 3.5466805953613568e-5, 6.5555715512772429e-5, 1.1366396486403262e-4, 1.9291701708187514e-4, 3.3130362989615586e-4, 5.9653179346894095e-4, 1.1870191543758008e-3, 2.9051553494513434e-3, 1.2254634473989927e-2], [-8.9762464628343800e-9, -8.3604383604394143e-8, -2.4904185105947276e-7, -5.4391211790562899e-7, -1.0458907199134609e-6, -1.9110983468931188e-6, -3.4724422327235873e-6, -6.5140103013353798e-6, -1.3172557946516902e-5, -3.0706294539244085e-5, -9.4884938997294566e-5, -6.0629519250549984e-4], [-1.8073769421790489e-11, -1.4732043888179507e-10, -3.1136964811205864e-10, -2.4927774218233734e-10, 6.7752623476743018e-10, 4.0586688264091628e-9, 1.4102813507287288e-8, 4.3116303648048591e-8, 1.3294638777921301e-7, 4.6404562368202305e-7, 2.2156870789117773e-6, 2.5369766945010227e-5], [7.8286915417173766e-12, 7.2400671975994856e-11, 2.1252338236688282e-10, 4.5341231522253904e-10, 8.4251375092863916e-10, 1.4659980445729122e-9, 2.4813710675607988e-9, 4.1758652526626481e-9, 7.0059381340764813e-9, 1.0771138093812962e-8, -1.8590932553854892e-9, -7.5957355302443917e-7], [-1.3426608360902791e-13, -1.2729376277547781e-12, -3.9266804912850930e-12, -9.0257841020060869e-12, -1.8538941719847444e-11, -3.6666864138106253e-11, -7.2938535701691679e-11, -1.5110469695625396e-10, -3.3844091845430122e-10, -8.5974510171230222e-10, -2.5652731171466838e-9, 6.1520126661365636e-9], [-1.8080845275437891e-14, -1.6607675724913470e-13, -4.8061154379090739e-13, -1.0020973814486392e-12, -1.7994473622459919e-12, -2.9777857170078834e-12, -4.6714583960602773e-12, -6.9326615731803899e-12, -8.9842895243151312e-12, -4.0366693979921566e-12, 6.8852440724941486e-11, 9.2735452142785499e-10], [1.3152851965156719e-15, 1.2207955730094048e-14, 3.6105607460426933e-14, 7.7967683458351329e-14, 1.4749016085291720e-13, 2.6335001404838121e-13, 4.6293297658562817e-13, 8.2592775000558542e-13, 1.5338232951924965e-12, 2.9903647520579245e-12, 4.9829955524190975e-12, -6.1284437037495113e-11], [-1.0256788322035911e-17, -1.0064970550844823e-16, -3.3077954701728471e-16, -8.2655578765379944e-16, -1.8667475510088247e-15, -4.0780179727169752e-15, -8.9632351238086528e-15, -2.0494144996884226e-14, -5.0654410201967302e-14, -1.4245906888878234e-13, -4.7345872072422751e-13, 1.4402707733413730e-12], [-3.4661969957712221e-18, -3.1916721766433853e-17, -9.2841868939996759e-17, -1.9519620834214484e-16, -3.5487311352262329e-16, -5.9799497869988924e-16, -9.6419054648502779e-16, -1.4979377539571147e-15, -2.1439384297866169e-15, -1.8906715379005572e-15, 9.5116403348375401e-15, 5.0214935128183952e-14], [1.9732092448977680e-19, 1.8370786542481137e-18, 5.4672078745739567e-18, 1.1920017790282332e-17, 2.2851304461464621e-17, 4.1524817680742933e-17, 7.4661159808976306e-17, 1.3708509869536313e-16, 2.6405493114490565e-16, 5.3961205127376589e-16, 9.7094242815976227e-16, -5.7141185559141787e-15], [9.6481977172642934e-22, 7.8754834102698761e-21, 1.6718275382094447e-20, 1.3712570417791860e-20, -3.4898491788132197e-20, -2.1299625703201497e-19, -7.4102943379769147e-19, -2.2516734876282959e-18, -6.8031609393292747e-18, -2.2309185686139914e-17, -8.3100627541436548e-17, 1.8812587781190371e-16], [-6.3490614838667340e-22, -5.8611655149493162e-21, -1.7139352813060867e-20, -3.6335218324377919e-20, -6.6852228951472060e-20, -1.1454029688757744e-19, -1.8902042034109848e-19, -3.0381942125012504e-19, -4.6077944454589076e-19, -4.9210261395798022e-19, 1.5889441598323131e-18, 3.1903286526455332e-18]],
        [[8.6955964796425635e-4, 7.9027919077474148e-3, 2.2392698141557460e-2, 4.5258703186829914e-2, 7.8086904405383100e-2, 1.2346617537308439e-1, 1.8564726272583479e-1, 2.7191413927177987e-1, 3.9574991309738074e-1, 5.8539706510832811e-1, 9.1364176525260644e-1, 1.6662200732975940e+0], [-3.0001301628229173e-5, -2.7457469852513670e-4, -7.8918985439642196e-4, -1.6307102961127427e-3, -2.9018398592170912e-3, -4.7811891607888040e-3, -7.5866936574674878e-3, -1.1919812341903897e-2, -1.9035472922760560e-2, -3.1977730621129404e-2, -6.0220070491235438e-2, -1.5285221799009343e-1], [5.1374719524974052e-7, 4.7348695430433121e-6, 1.3804535527652279e-5, 2.9161719934062120e-5, 5.3521106851579752e-5, 9.1891018974269140e-5, 1.5387068353355670e-4, 2.5931800341441860e-4, 4.5437289925685481e-4, 8.6680294160936454e-4, 1.9693804369597237e-3, 6.9552485176762992e-3], [-8.2851057707544437e-9, -7.6924397159424699e-8, -2.2767325171658789e-7, -4.9228673726741756e-7, -9.3336289790311293e-7, -1.6733578374623749e-6, -2.9645712472834667e-6, -5.3761444591925232e-6, -1.0375322849011758e-5, -2.2582225333081159e-5, -6.2263643695432708e-5, -3.0837409526320528e-4], [8.6180405325796242e-11, 8.1210647694488436e-10, 2.4760824639640373e-9, 5.5991065066389216e-9, 1.1275039185004272e-8, 2.1822379335715975e-8, 4.2489995082466210e-8, 8.6467023961827267e-8, 1.9225830820558005e-7, 5.0052753768360170e-7, 1.7583769828743653e-6, 1.2835916264922303e-5], [2.3757938583594540e-12, 2.1621336838960034e-11, 6.1329100088709381e-11, 1.2352439884017810e-10, 2.0945354796547371e-10, 3.1397420763383174e-10, 4.0553348823770391e-10, 3.4929290257752044e-10, -4.3277015174747761e-10, -4.8664926189056623e-9, -3.4383266074005583e-8, -4.6939837175196639e-7], [-2.0921322009994199e-13, -1.9356781729331926e-12, -5.6873384366623477e-12, -1.2153431094400346e-11, -2.2641808838791174e-11, -3.9561741197332491e-11, -6.7428087211702697e-11, -1.1490352282996299e-10, -1.9800657630561612e-10, -3.3131759742309956e-10, -2.3295070019402752e-10, 1.3151137525523782e-8], [6.0462605215607500e-15, 5.6550647021740065e-14, 1.6986748640692150e-13, 3.7565849756997543e-13, 7.3438180509410612e-13, 1.3692538028385433e-12, 2.5456027950105058e-12, 4.8870742586447157e-12, 1.0041276219672382e-11, 2.3012971112251872e-11, 5.9302163554352823e-11, -1.5199846216022232e-10], [1.5076320556677749e-16, 1.3591093134579767e-15, 3.7758457290361473e-15, 7.3297238554334295e-15, 1.1651285341841362e-14, 1.5400719260494918e-14, 1.4172066397296384e-14, -6.7079093166386295e-15, -1.0075811399720635e-13, -5.0007055701125442e-13, -2.5263021726180613e-12, -1.0634841968431501e-11], [-2.4288696699365793e-17, -2.2407712198392998e-16, -6.5446112709706944e-16, -1.3853135440355165e-15, -2.5453027412912442e-15, -4.3606107633816009e-15, -7.2246173830316334e-15, -1.1795140686716473e-14, -1.8894614508990704e-14, -2.6698240023138923e-14, 7.4151623419469729e-15, 8.6890851019890706e-13], [1.0730160131480103e-18, 9.9829390763119203e-18, 2.9667306331789475e-17, 6.4539937637863430e-17, 1.2334421263992049e-16, 2.2322360516325292e-16, 3.9928763515977462e-16, 7.2869747666347163e-16, 1.3957813546905604e-15, 2.8604828299705924e-15, 5.6153553681144518e-15, -3.3047610340984239e-14], [-2.7453081266252245e-21, -3.0501347020131558e-20, -1.2063238248149225e-19, -3.6324924232010899e-19, -9.6290275569485573e-19, -2.3905585180707895e-18, -5.7978551414858449e-18, -1.4268203878191789e-17, -3.7148453013009310e-17, -1.0773693243231701e-16, -3.6022809097227191e-16, 4.3163404396244866e-16], [-2.4807029761343863e-21, -2.2792269131272894e-20, -6.5994024235358540e-20, -1.3769789770047982e-19, -2.4743867217385008e-19, -4.0962576628540563e-19, -6.4214521878404767e-19, -9.4942912207457825e-19, -1.2148032813739080e-18, -4.9804673582546187e-19, 8.5454066728125477e-18, 3.2809689681278675e-17], [1.4968601320553735e-22, 1.3889446340241280e-21, 4.1051407669042133e-21, 8.8530926047204679e-21, 1.6705797119299809e-20, 2.9692726700093039e-20, 5.1753589774469193e-20, 9.0837150853023250e-20, 1.6306763927113695e-19, 2.9251435647563604e-19, 3.3899518236834789e-19, -2.6795773500430179e-18]],
        [[8.1337018079457959e-4, 7.3887672941748107e-3, 2.0916614699673013e-2, 4.2213014471262981e-2, 7.2678200946485496e-2, 1.1457967007285662e-1, 1.7160046282768810e-1, 2.4996123625430012e-1, 3.6095537434851024e-1, 5.2760793232100634e-1, 8.0689389934322225e-1, 1.4064982991775305e+0], [-2.6263431341848179e-5, -2.4014797738465502e-4, -6.8895506846952100e-4, -1.4194204143601058e-3, -2.5152441083969900e-3, -4.1202404212274808e-3, -6.4863088633495119e-3, -1.0080029757982276e-2, -1.5848116557781294e-2, -2.6000379452283905e-2, -4.7027460823150889e-2, -1.0913184300866452e-1], [4.2344731659593746e-7, 3.8973589771930218e-6, 1.1331165726107606e-5, 2.3831938862411166e-5, 4.3464930330745187e-5, 7.3980857472185632e-5, 1.2242134790114549e-4, 2.0296882252928670e-4, 3.4743801840719383e-4, 6.3976332007085304e-4, 1.3685187354732651e-3, 4.2277801964713099e-3], [-6.7391991566759503e-9, -6.2439151378828711e-8, -1.8400184953823981e-7, -3.9516299243384212e-7, -7.4200839292255254e-7, -1.3128351488561592e-6, -2.2847495281932335e-6, -4.0438746316313825e-6, -7.5425370526335948e-6, -1.5603273836639029e-5, -3.9521225178926799e-5, -1.6280303158529340e-4], [9.7571719675840013e-11, 9.1113535703677416e-10, 2.7281664136327321e-9, 6.0045218470722824e-9, 1.1664350581814176e-8, 2.1581361875606757e-8, 3.9781107490099889e-8, 7.5782049974538531e-8, 1.5543388868291855e-7, 3.6493361151481992e-7, 1.1067373317570317e-6, 6.1540106313127635e-6], [-6.1105101653511113e-13, -5.9096145486836336e-12, -1.8927750558857616e-11, -4.5811801731494826e-11, -1.0008836884224278e-10, -2.1202303828130752e-10, -4.5413020654530795e-10, -1.0193158150198035e-9, -2.5035455146127293e-9, -7.2082982255408720e-9, -2.8007127721433583e-8, -2.2231247272956899e-7], [-5.2395429809177823e-14, -4.7905976376142415e-13, -1.3726733301613629e-12, -2.8137655989807183e-12, -4.9139104789459490e-12, -7.7606375196075886e-12, -1.1171105467351642e-11, -1.3624641314826643e-11, -7.1810648880040344e-12, 5.2361733454333939e-11, 5.0462511991461930e-10, 7.2998596397067402e-9], [3.7480708512188063e-15, 3.4638629756724718e-14, 1.0153857567400229e-13, 2.1619700631910714e-13, 4.0071399817413308e-13, 6.9528198936401103e-13, 1.1738290474199241e-12, 1.9740511510581483e-12, 3.3350651399695680e-12, 5.3830806000154462e-12, 3.0377386985305739e-12, -1.9690602674133072e-10], [-1.4023231768177266e-16, -1.3039383400624054e-15, -3.8708186736843365e-15, -8.4077278239180616e-15, -1.6038104619510442e-14, -2.8969035096559121e-14, -5.1743475377943960e-14, -9.4461508065989568e-14, -1.8191665291514880e-13, -3.8114035843700006e-13, -8.3748072866526077e-13, 3.1017694311751598e-12], [1.6080980726450628e-18, 1.5394710912144152e-17, 4.8371205672506444e-17, 1.1404236505689471e-16, 2.4145042628422954e-16, 4.9374441759332298e-16, 1.0171522189795067e-15, 2.1844782903497154e-15, 5.0807568696513640e-15, 1.3485195312501590e-14, 4.3631759962178257e-14, 6.7226813761794770e-14], [1.8337385878501782e-19, 1.6752858147280127e-18, 4.7930128804954113e-18, 9.8050121954588901e-18, 1.7088805491559157e-17, 2.6973166267755091e-17, 3.9037060163988198e-17, 4.9137985501879604e-17, 3.5801698794990963e-17, -1.1426635086987302e-16, -1.1524644052310359e-15, -8.1600290190685940e-15], [-1.4885082749171529e-20, -1.3742243660928764e-19, -4.0197555990716229e-19, -8.5296323408367765e-19, -1.5730051992136316e-18, -2.7098259042493668e-18, -4.5282845310370208e-18, -7.5013190912845102e-18, -1.2376786771841521e-17, -1.9151016027533615e-17, -9.7006306329536158e-18, 3.8711056660842731e-16], [5.5593294503376965e-22, 5.1706355806485199e-21, 1.5356179619277231e-20, 3.3370432938944262e-20, 6.3667341198274834e-20, 1.1492655520539816e-19, 2.0477241540778039e-19, 3.7147958807334744e-19, 7.0493842419622413e-19, 1.4239225044604036e-18, 2.7645530564543499e-18, -1.1163397993040183e-17], [-4.6245161202520853e-24, -4.5159078954487999e-23, -1.4706589743826061e-22, -3.6292876631893260e-22, -8.0718009145765339e-22, -1.7312236945297733e-21, -3.7203963715639752e-21, -8.2622196574062995e-21, -1.9604312055667619e-20, -5.1737311887534779e-20, -1.5374823704174489e-19, 1.0378463752598627e-19]],
        [[7.6399273689215294e-4, 6.9374447952482199e-3, 1.9622861709443487e-2, 3.9550909945458269e-2, 6.7969358181877263e-2, 1.0688505409742032e-1, 1.5952754538884167e-1, 2.3128476018420474e-1, 3.3177939723150830e-1, 4.8019558548072033e-1, 7.2247243226000138e-1, 1.2168629462599553e+0], [-2.3174024111849239e-5, -2.1173007304650591e-4, -6.0643229690604954e-4, -1.2461847540024146e-3, -2.2001469873421094e-3, -3.5859014781305621e-3, -5.6065270413684590e-3, -8.6313655110269201e-3, -1.3392125438473507e-2, -2.1542308954157701e-2, -3.7713615450742032e-2, -8.1734766554568674e-2], [3.5139685033119458e-7, 3.2303510381328621e-6, 9.3688529858205925e-6, 1.9628740940115483e-5, 3.5601982598828431e-5, 6.0140018179489698e-5, 9.8499905287791915e-5, 1.6102577992188453e-4, 2.7022945035449658e-4, 4.8311320874097903e-4, 9.8413983769214931e-4, 2.7444293811775891e-3], [-5.3166014094039685e-9, -4.9177020198017208e-8, -1.4442651068444187e-7, -3.0851458150873455e-7, -5.7490071608218554e-7, -1.0065942049291536e-6, -1.7271899555667626e-6, -2.9986011362954354e-6, -5.4434978087049981e-6, -1.0817703046090853e-5, -2.5646594695054335e-5, -9.2050601450912733e-5], [7.8987857673928146e-11, 7.3528794230398353e-10, 2.1876381676653638e-9, 4.7676528728467343e-9, 9.1353797491535908e-9, 1.6596672822090076e-8, 2.9872488431887673e-8, 5.5158238600000540e-8, 1.0849839051129655e-7, 2.4012866089796010e-7, 6.6396578463792185e-7, 3.0745895122975698e-6], [-1.0360848774187594e-12, -9.7294810676478050e-12, -2.9462444275831974e-11, -6.5958175546297074e-11, -1.3110667714537243e-10, -2.4976501165883906e-10, -4.7724766096124608e-10, -9.4951757096428046e-10, -2.0517036183936920e-9, -5.1277636695316406e-9, -1.6761745237189631e-8, -1.0140974214507656e-7], [3.1466775040983985e-15, 3.2647460942866935e-14, 1.1756258008301607e-13, 3.2571457228834708e-13, 8.1258861518837312e-13, 1.9417279613817872e-12, 4.6227239016472780e-12, 1.1377629201552022e-11, 3.0311139527645093e-11, 9.3905570312343886e-11, 3.8985914631361936e-10, 3.2421331954346301e-9], [7.2795960221383241e-16, 6.6569084150555902e-15, 1.9080917299365310e-14, 3.9135842076988618e-14, 6.8410501849726953e-14, 1.0820627844763995e-13, 1.5616977956692796e-13, 1.9158281167870748e-13, 1.0506379844519656e-13, -7.1405405046905982e-13, -6.9262861580559854e-12, -9.6914690090292762e-11], [-4.8436024493799268e-17, -4.4695480328043721e-16, -1.3061003173864067e-15, -2.7672247093291027e-15, -5.0923054842608171e-15, -8.7469425891420732e-15, -1.4556759322375645e-14, -2.3959398002578800e-14, -3.9025685108983384e-14, -5.7795323183113779e-14, 1.7154002168006081e-16, 2.5233237793020635e-12], [2.0411521521125191e-18, 1.8914874090937624e-17, 5.5760661606118599e-17, 1.1981563528843289e-16, 2.2511732224108602e-16, 3.9844208482840321e-16, 6.9282838946418058e-16, 1.2203268142064697e-15, 2.2361454528876658e-15, 4.3378710089933353e-15, 8.0198004770875021e-15, -4.7348572492964719e-14], [-5.3983242446771793e-20, -5.0361548926461124e-19, -1.5050295027159812e-18, -3.3027360923074127e-18, -6.3900530370945629e-18, -1.1759930564835595e-17, -2.1521558918924396e-17, -4.0565038056445642e-17, -8.1659146443272175e-17, -1.8351206471010636e-16, -4.7550915867913804e-16, 9.7354796951037433e-18], [5.5396878421606432e-23, 7.4976822794576112e-22, 3.6413501384183305e-21, 1.2650945248696264e-20, 3.6700928909169945e-20, 9.6376425783935423e-20, 2.4211107439747220e-19, 6.0941925136450829e-19, 1.6132648023950357e-18, 4.7822083901541860e-18, 1.7317895275137986e-17, 5.2793987211910197e-17], [8.6564357768575052e-23, 7.9239740403459882e-22, 2.2767331570463251e-21, 4.6919140267103086e-21, 8.2775678133882035e-21, 1.3339632140995829e-20, 2.0075766211798970e-20, 2.7687519035356347e-20, 2.9958664722207688e-20, -1.0084040811729045e-20, -3.5179215291004531e-19, -3.0259791793116763e-18], [-5.4338626963562221e-24, -5.0140902656276625e-23, -1.4651296055823156e-22, -3.1037564119506275e-22, -5.7103942139528534e-22, -9.8060699566509399e-22, -1.6318231536122234e-21, -2.6890013662962735e-21, -4.4112636952116142e-21, -6.8266027362625204e-21, -4.3804322271454426e-21, 1.0980481195602267e-19]],
        [[7.2026799179831581e-4, 6.5380904668436625e-3, 1.8479851250410343e-2, 3.7204698629418916e-2, 6.3833662137325130e-2, 1.0015906939946648e-1, 1.4904214202852003e-1, 2.1520599086800020e-1, 3.0696906514449566e-1, 4.4060624162405279e-1, 6.5405632142936140e-1, 1.0723544982829180e+0], [-2.0598085469600015e-5, -1.8806205507633731e-4, -5.3786206750218193e-4, -1.1027629518490503e-3, -1.9406317643036072e-3, -3.1489434499185751e-3, -4.8939894563197431e-3, -7.4734317342318145e-3, -1.1464930597365823e-2, -1.8138380576886314e-2, -3.0913428249903451e-2, -6.3492129544707111e-2], [2.9452290903751156e-7, 2.7046490045997719e-6, 7.8271353010757507e-6, 1.6342783028420865e-5, 2.9498230988858851e-5, 4.9499280917002973e-5, 8.0348246728696374e-5, 1.2976130098901000e-4, 2.1409553910632614e-4, 3.7334100670947273e-4, 7.3053063282903367e-4, 1.8795785866026675e-3], [-4.2099564947546916e-9, -3.8885498839696820e-8, -1.1386841009537036e-7, -2.4212552870079907e-7, -4.4825233558764656e-7, -7.7787635630759434e-7, -1.3187798137183486e-6, -2.2524687439609777e-6, -3.9970494711109984e-6, -7.6827641423145951e-6, -1.7260188825264258e-5, -5.5632963360534549e-5], [6.0004094524589666e-11, 5.5747196905850247e-10, 1.6519236102855236e-9, 3.5775273874744978e-9, 6.7941063229852343e-9, 1.2194799573808349e-8, 2.1597511619996940e-8, 3.9021596205795903e-8, 7.4493008055279072e-8, 1.5787002689996221e-7, 4.0734820012970860e-7, 1.6454387988288469e-6], [-8.3711933514343176e-13, -7.8255993723001141e-12, -2.3482538227141408e-11, -5.1850182442002213e-11, -1.0114916642373557e-10, -1.8809666613208157e-10, -3.4866746423441787e-10, -6.6781265771133471e-10, -1.3746507474705005e-9, -3.2197588734052698e-9, -9.5648601297815980e-9, -4.8534364396557746e-8], [1.0156570162000019e-14, 9.5862645105405487e-14, 2.9324766465304934e-13, 6.6653857431844671e-13, 1.3519282516337234e-12, 2.6414339596511678e-12, 5.2037933711927110e-12, 1.0735136554735211e-11, 2.4205242818371705e-11, 6.3596229962272806e-11, 2.2039191486139629e-10, 1.4199815522195025e-9], [-1.5864032447672269e-17, -1.8769938737448571e-16, -8.0273748277058365e-16, -2.5841785684028356e-15, -7.2297402413783175e-15, -1.8809989181440283e-14, -4.7765505958779657e-14, -1.2375355143148687e-13, -3.4435985030745890e-13, -1.1097523307447769e-12, -4.7791036916965190e-12, -4.0701541958619293e-11], [-7.4054887283537944e-18, -6.7616168852907118e-17, -1.9316344997345491e-16, -3.9389079289024361e-16, -6.8185167686353060e-16, -1.0601235616230406e-15, -1.4776316251618959e-15, -1.6424636499657337e-15, -1.5726284337294609e-16, 1.0447584516803286e-14, 8.5526790935419734e-14, 1.1149674976897073e-12], [4.7591349012444240e-19, 4.3845528044201655e-18, 1.2769933124626621e-17, 2.6911156247254125e-17, 4.9132980052148875e-17, 8.3435339141677550e-17, 1.3651833040432835e-16, 2.1867753495615967e-16, 3.3826581906502589e-16, 4.2960574250702919e-16, -5.4502913260837853e-16, -2.7818418899553384e-14], [-2.1105692479787847e-20, -1.9511392242757247e-19, -5.7237347162040469e-19, -1.2204484886277817e-18, -2.2680367467581447e-18, -3.9543660459537715e-18, -6.7367042698344483e-18, -1.1532514037819658e-17, -2.0257105654667341e-17, -3.6495727670873325e-17, -5.3649912596076168e-17, 5.6651143743885737e-16], [7.0086882114859488e-22, 6.5017742628554326e-21, 1.9209769706955231e-20, 4.1423212811763976e-20, 7.8230736349817768e-20, 1.3947998133895052e-19, 2.4509709334805567e-19, 4.3859743530357815e-19, 8.2508452053652190e-19, 1.6872512979753296e-18, 3.7105876029616119e-18, -5.8917209298474057e-18], [-1.4642973797869522e-23, -1.3694945165686358e-22, -4.1131954808681661e-22, -9.0938674522855323e-22, -1.7769363179368596e-21, -3.3106665357620580e-21, -6.1492431241560381e-21, -1.1797809836914249e-20, -2.4275533994170821e-20, -5.6244325291678924e-20, -1.5505488894363021e-19, -2.1225531219822827e-19], [-6.9574592541238687e-26, -5.7189929307991722e-25, -1.2459917622985158e-24, -1.1986887394100740e-24, 1.6886088465321222e-24, 1.2493104395535325e-23, 4.4045916565160777e-23, 1.3166677668905751e-22, 3.8556937922168911e-22, 1.2185699372922302e-21, 4.6273081420528637e-21, 1.7274676818495330e-20]],
        [[6.8127876067836775e-4, 6.1822255916348700e-3, 1.7462712358087783e-2, 3.5121352589899765e-2, 6.0172560916662058e-2, 9.4229783816586631e-2, 1.3985065906451195e-1, 2.0121850059593194e-1, 2.8561312506642736e-1, 4.0705165758285865e-1, 5.9748750078263455e-1, 9.5856666608946127e-1], [-1.8428847518659105e-5, -1.6815083897030298e-4, -4.8029462865906411e-4, -9.8274298572588623e-4, -1.7244567895513028e-3, -2.7872348837051305e-3, -4.3091187703569116e-3, -6.5337761165675550e-3, -9.9256629154307031e-3, -1.5481889093317123e-2, -2.5799749363040832e-2, -5.0741731794799139e-2], [2.4925300110322764e-7, 2.2867680761591630e-6, 6.6049973988200635e-6, 1.3749204250220976e-5, 2.4710129878430430e-5, 4.1221883525529722e-5, 6.6386733333148179e-5, 1.0607901409429553e-4, 1.7246849156868058e-4, 2.9441996306643702e-4, 5.5702029617633452e-4, 1.3430033791771036e-3], [-3.3710628189006972e-9, -3.1097789140680053e-8, -9.0828480329858458e-8, -1.9235341475034470e-7, -3.5406484350662478e-7, -6.0963178071456904e-7, -1.0227280870627707e-6, -1.7221914075777666e-6, -2.9967294788469603e-6, -5.5988532939159667e-6, -1.2025865601269006e-5, -3.5545156737550619e-5], [4.5575031377065153e-11, 4.2273901524144010e-10, 1.2485626904425066e-9, 2.6900873158569049e-9, 5.0715616165270123e-9, 9.0129556267085100e-9, 1.5751048056482255e-8, 2.7952205656971750e-8, 5.2057371463370987e-8, 1.0644959784747331e-7, 2.5959314252832254e-7, 9.4066907333552430e-7], [-6.1419483449881605e-13, -5.7286984937520501e-12, -1.7111286754197897e-11, -3.7512914639674884e-11, -7.2448971887260668e-11, -1.3292310117751777e-10, -2.4205318997141598e-10, -4.5283038582345987e-10, -9.0291314822379062e-10, -2.0214845965288323e-9, -5.5989724703821078e-9, -2.4882210836051911e-8], [8.0989390147263491e-15, 7.5994753342754455e-14, 2.2977077886475455e-13, 5.1323020962080411e-13, 1.0171350005323081e-12, 1.9304755419245408e-12, 3.6713146226228912e-12, 7.2578824878107943e-12, 1.5532231395541410e-11, 3.8165069529335922e-11, 1.2032635499044281e-10, 6.5707190140019754e-10], [-9.3237760793618480e-17, -8.8362669621075673e-16, -2.7251257448933500e-15, -6.2696362953574891e-15, -1.2922589898926303e-14, -2.5759496655745884e-14, -5.1988180291058327e-14, -1.1035928122103719e-13, -2.5734231123048590e-13, -7.0336580946027139e-13, -2.5522588795971683e-12, -1.7264674239700818e-11], [1.8178162373222413e-19, 2.0902489655651995e-18, 8.6563111517455291e-18, 2.7238777811666623e-17, 7.5227974612638344e-17, 1.9467682582798482e-16, 4.9455534823172901e-16, 1.2881095859771649e-15, 3.6200683465245975e-15, 1.1837466654267010e-14, 5.1919195896813760e-14, 4.4782175319821457e-13], [5.8355693009066513e-20, 5.3122951445583013e-19, 1.5076617639296778e-18, 3.0387311683434362e-18, 5.1550633610193355e-18, 7.7198145098684110e-18, 9.8951998472586521e-18, 8.0636668105530295e-18, -1.3466874955764314e-17, -1.3461417775748162e-16, -9.2963081693122790e-16, -1.1281013797462833e-14], [-3.7026500266884956e-21, -3.4054469410475273e-20, -9.8831601525517369e-20, -2.0707602089145679e-19, -3.7478064251861427e-19, -6.2814321819643303e-19, -1.0068687920733521e-18, -1.5560620801842881e-18, -2.2249837016127487e-18, -2.0164485518610468e-18, 1.0138023039942601e-17, 2.6733015073240977e-16], [1.6724769658355911e-22, 1.5432052693620293e-21, 4.5093489184464369e-21, 9.5557346400705709e-21, 1.7600085488335892e-20, 3.0305449059248868e-20, 5.0732840393305866e-20, 8.4658734893707948e-20, 1.4271082780561642e-19, 2.3630021233233527e-19, 2.2598781120229824e-19, -5.5793190112677114e-18], [-6.0748766012334992e-24, -5.6187714906585478e-23, -1.6500231857336166e-22, -3.5244569232889012e-22, -6.5676586854011068e-22, -1.1499552903686355e-21, -1.9724842664339333e-21, -3.4165992897796940e-21, -6.1397088105002126e-21, -1.1686566476522956e-20, -2.1873717320288011e-20, 8.5002445301590607e-20], [1.7182946402981167e-25, 1.5946326216672464e-24, 4.7151184772689053e-24, 1.0179911250639176e-23, 1.9258588074464274e-23, 3.4417707725841588e-23, 6.0678554755777520e-23, 1.0911794332936768e-22, 2.0700572952710273e-22, 4.3108757901217214e-22, 1.0084642066409953e-21, 2.4126362800765400e-23]],
        [[6.4629516483991690e-4, 5.8631121487571074e-3, 1.6551735326059944e-2, 3.3259032295583317e-2, 5.6908780128447491e-2, 8.8963530001958488e-2, 1.3172745156180714e-1, 1.8893908604149419e-1, 2.6703683775896601e-1, 3.7824908059238454e-1, 5.4993198917615723e-1, 8.6663526051935387e-1], [-1.6585107375235871e-5, -1.5124250767035360e-4, -4.3149899493931328e-4, -8.8130356941214592e-4, -1.5424934892262799e-3, -2.4844574638613823e-3, -3.8231707025549395e-3, -5.7608378783135097e-3, -8.6768504713817230e-3, -1.3369099702089039e-2, -2.1857818438717990e-2, -4.1480976935210514e-2], [2.1280193317121760e-7, 1.9506953032896233e-6, 5.6245262045324870e-6, 1.1676464138692151e-5, 2.0904380569259424e-5, 3.4691335940683230e-5, 5.5480579569994796e-5, 8.7825250410868206e-5, 1.4096878281939579e-4, 2.3626334184188905e-4, 4.3438472416250023e-4, 9.9273079684108057e-4], [-2.7304311542763690e-9, -2.5159580487224192e-8, -7.3314605983901858e-8, -1.5470188285156888e-7, -2.8330205779562987e-7, -4.8440541413983521e-7, -8.0511301532893066e-7, -1.3389111674817411e-6, -2.2902478816247418e-6, -4.1753157584131043e-6, -8.6325916782409724e-6, -2.3758176636416745e-5], [3.5032246111596413e-11, 3.2448799352708092e-10, 9.5560127887358474e-10, 2.0495667791215019e-9, 3.8392388932007054e-9, 6.7636462340457433e-9, 1.1683091622932051e-8, 2.0411294718993006e-8, 3.7207458593497260e-8, 7.3785676423992492e-8, 1.7155352742720248e-7, 5.6857653306224040e-7], [-4.4929352020943278e-13, -4.1833278722829018e-12, -1.2450768891138650e-11, -2.7143727296411556e-11, -5.2010566349555374e-11, -9.4409602342497043e-11, -1.6948704619599669e-10, -3.1108807019971919e-10, -6.0435105580187017e-10, -1.3037235060858447e-9, -3.4088551122831601e-9, -1.3606156826651053e-8], [5.7447247737924939e-15, 5.3771051751720998e-14, 1.6175999244205377e-13, 3.5851611504767068e-13, 7.0285859294438760e-13, 1.3149169270360799e-12, 2.4541099668575643e-12, 4.7338804215746152e-12, 9.8043128464036590e-12, 2.3015165479183607e-11, 6.7697330905116871e-11, 3.2550694475372257e-10], [-7.2025235464795798e-17, -6.7805809923043973e-16, -2.0637573520171568e-15, -4.6565820435171154e-15, -9.3568170543024560e-15, -1.8077983823953288e-14, -3.5154837241885606e-14, -7.1429724031895617e-14, -1.5806862096868772e-13, -4.0461513234343134e-13, -1.3412420914521747e-12, -7.7796222411990942e-12], [8.0354461518373177e-19, 7.6376447176032693e-18, 2.3693136761044685e-17, 5.4992535814081251e-17, 1.1469419625975958e-16, 2.3207234210965025e-16, 4.7704394312725805e-16, 1.0353426118349940e-15, 2.4792787958355530e-15, 6.9948889458250013e-15, 2.6348038480478414e-14, 1.8538475202368229e-13], [-2.8488737953479647e-21, -2.9944898024680162e-20, -1.1014635205716437e-19, -3.1286156149958159e-19, -8.0171873297180847e-19, -1.9723599560128845e-18, -4.8529831378706005e-18, -1.2416992134082704e-17, -3.4668723190089158e-17, -1.1369175323452483e-16, -5.0377114217039169e-16, -4.3835201051341965e-15], [-3.6488639763279610e-22, -3.3044499481499523e-21, -9.2698017151701751e-21, -1.8289295173971092e-20, -2.9838250591835032e-20, -4.1243189814528844e-20, -4.2282939674324470e-20, 4.9589139943583835e-21, 2.5376240702723016e-19, 1.4558723397781342e-18, 8.8858248785583520e-18, 1.0179250625998855e-16], [2.3491647311027678e-23, 2.1564875064722975e-22, 6.2332426584256098e-22, 1.2972759879212170e-21, 2.3234335248426238e-21, 3.8304559730846566e-21, 5.9720879391776249e-21, 8.7455669249226011e-21, 1.0820319214448861e-20, 1.3381470520416913e-21, -1.2037579761936732e-19, -2.2742909464916076e-18], [-1.0652126598534452e-24, -9.8125110641205612e-24, -2.8574492318911990e-23, -6.0220809552139873e-23, -1.1002862002287850e-22, -1.8728790896445843e-22, -3.0830533040610149e-22, -5.0119605537534061e-22, -8.0605805300791840e-22, -1.1841213357448406e-21, -8.1001941687648770e-23, 4.6949201478815972e-20], [4.0099011717558178e-26, 3.7011571692532187e-25, 1.0822723131077461e-24, 2.2963163814710673e-24, 4.2383573589068488e-24, 7.3241006392116221e-24, 1.2338574517332392e-23, 2.0838839071576049e-23, 3.6052855905517740e-23, 6.4125689106350692e-23, 9.6866854078069975e-23, -8.1606779893182434e-22]],
        [[6.1472991387120760e-4, 5.5753350103325763e-3, 1.5731119397849293e-2, 3.1584326304307594e-2, 5.3980951233719962e-2, 8.4254948907832596e-2, 1.2449644597913478e-1, 1.7807276427614479e-1, 2.5073044405392203e-1, 3.5325529860148557e-1, 5.0939324054458265e-1, 7.9080941416368614e-1], [-1.5004861289439959e-5, -1.3676227757673481e-4, -3.8977960907879285e-4, -7.9479849175847757e-4, -1.3878861851960701e-3, -2.2284716833013000e-3, -3.4150320617350887e-3, -5.1173876078664603e-3, -7.6497540946260645e-3, -1.1661142526927520e-2, -1.8755107522717137e-2, -3.4543118337502536e-2], [1.8312583520699821e-7, 1.6773808353110901e-6, 4.8289043128119314e-6, 1.0000286594046278e-5, 1.7841738431977660e-5, 2.9470589015875026e-5, 4.6838460554755737e-5, 7.3530771279704477e-5, 1.1669651196372164e-4, 1.9247020897054833e-4, 3.4526768618637094e-4, 7.5443398793247774e-4], [-2.2349463584703566e-9, -2.0572964729119010e-8, -5.9824343012388488e-8, -1.2582522477470221e-7, -2.2936140620352217e-7, -3.8973586668902640e-7, -6.4240706345986553e-7, -1.0565493885179242e-6, -1.7801973739200115e-6, -3.1767703526536071e-6, -6.3561217881418576e-6, -1.6477103318097393e-5], [2.7276126758396233e-11, 2.5232496101351552e-10, 7.4114885265647702e-10, 1.5831468530667419e-9, 2.9485045890955579e-9, 5.1540700379627753e-9, 8.8108233479160278e-9, 1.5181304994891378e-8, 2.7156713295829760e-8, 5.2433284893345793e-8, 1.1701125214192346e-7, 3.5986520939447869e-7], [-3.3287342982158724e-13, -3.0946009669400988e-12, -9.1815202582313690e-12, -1.9918523898695393e-11, -3.7902407587159090e-11, -6.8157724423586494e-11, -1.2083953048860933e-10, -2.1813054242455521e-10, -4.1426307654220439e-10, -8.6540683172367668e-10, -2.1540570544896883e-9, -7.8595064124824291e-9], [4.0608361964681478e-15, 3.7939539771821708e-14, 1.1370321108121345e-13, 2.5052490087430371e-13, 4.8708075204222338e-13, 9.0107853694797585e-13, 1.6569133701853566e-12, 3.1335661632629612e-12, 6.3184099951510749e-12, 1.4281827562704374e-11, 3.9650989518626430e-11, 1.7164596833822984e-10], [-4.9410733664954495e-17, -4.6395500024199389e-16, -1.4046883168089138e-15, -3.1439096962576230e-15, -6.2467946942425092e-15, -1.1891733389531871e-14, -2.2685561866424055e-14, -4.4962415365104865e-14, -9.6284478190529093e-14, -2.3555112413660720e-13, -7.2961819962868252e-13, -3.7480310648211229e-12], [5.9169274300182672e-19, 5.5863538433656560e-18, 1.7101881240554961e-17, 3.8931374990220042e-17, 7.9179339082607015e-17, 1.5538464450405539e-16, 3.0811324888785629e-16, 6.4121280214286590e-16, 1.4609270454977220e-15, 3.8743436002799449e-15, 1.3406143525229992e-14, 8.1796404381282872e-14], [-6.4719064991063707e-21, -6.1638271288947144e-20, -1.9198835515460967e-19, -4.4839403767750053e-19, -9.4324385807200773e-19, -1.9300658320943727e-18, -4.0241544745336640e-18, -8.8896159157190811e-18, -2.1756500600611837e-17, -6.3034506566932076e-17, -2.4504737773491381e-16, -1.7821416294991263e-15], [3.5434188296375102e-23, 3.5611191073595669e-22, 1.2216657350837232e-21, 3.2276050165269244e-21, 7.7715506638348054e-21, 1.8225588764182304e-20, 4.3362752356516109e-20, 1.0866700463590936e-19, 3.0052983512354855e-19, 9.8595921323079605e-19, 4.4054642297668960e-18, 3.8655584941001838e-17], [1.8058205427943135e-24, 1.6191710156188828e-23, 4.4392469781621251e-23, 8.3776620715987511e-23, 1.2485135734005397e-22, 1.3667259825624901e-22, 1.9515782184417319e-23, -5.6694472876429219e-22, -2.9384067393542921e-21, -1.3390338723192508e-20, -7.5425417652770962e-20, -8.2952351750674475e-19], [-1.2401554409231219e-25, -1.1357261654733069e-24, -3.2659761062576546e-24, -6.7380136545777013e-24, -1.1897589861004325e-23, -1.9154716603793136e-23, -2.8591003867911557e-23, -3.7953082648592594e-23, -3.2043793224231013e-23, 8.4950939259973403e-23, 1.1162025020613215e-21, 1.7387985200813993e-20], [5.6199359926878632e-27, 5.1687154347062455e-26, 1.5001753043446009e-25, 3.1447008144691343e-25, 5.6995289149069940e-25, 9.5861467195055975e-25, 1.5491418869707340e-24, 2.4405033775644305e-24, 3.6767742957073462e-24, 4.3127359263901209e-24, -8.8758938313375964e-24, -3.4716217718548129e-22]],
        [[5.8610519382203855e-4, 5.3144932647080397e-3, 1.4988051758630662e-2, 3.0070235512797450e-2, 5.1339727602754077e-2, 8.0019886066181576e-2, 1.1801825690134999e-1, 1.6838879811641017e-1, 2.3630169061040525e-1, 3.3136132797859601e-1, 4.7442413462507967e-1, 7.2719455775005642e-1], [-1.3640186678959845e-5, -1.2426650372163661e-4, -3.5383140531531964e-4, -7.2043348650229691e-4, -1.2554133927571552e-3, -2.0101088752269399e-3, -3.0689340075105821e-3, -4.5760334721427981e-3, -6.7948251917877519e-3, -1.0260808596464252e-2, -1.6269202333897094e-2, -2.9211314207722423e-2], [1.5872124519084466e-7, 1.4528350262612719e-6, 4.1765489341834303e-6, 8.6302019061183734e-6, 1.5349348914516890e-5, 2.5247084710514288e-5, 3.9902114195291166e-5, 6.2177777085692024e-5, 9.7692168847096388e-5, 1.5886614399628903e-4, 2.7895602779635373e-4, 5.8670741366115910e-4], [-1.8469272862377305e-9, -1.6985506884397291e-8, -4.9299073665844612e-8, -1.0338273317303349e-7, -1.8766926268406476e-7, -3.1710484818902325e-7, -5.1880512031115975e-7, -8.4485305737041116e-7, -1.4045629380172767e-6, -2.4596941781031982e-6, -4.7830534239856452e-6, -1.1783981405705806e-5], [2.1491383012460553e-11, 1.9858230811071254e-10, 5.8191530429793628e-10, 1.2384398072288305e-9, 2.2945429082361260e-9, 3.9828539466099654e-9, 6.7454738615169332e-9, 1.1479607604171496e-8, 2.0194008994996023e-8, 3.8082966829370954e-8, 8.2011476914286425e-8, 2.3668049109862411e-7], [-2.5007890860219199e-13, -2.3216714287331684e-12, -6.8687705713997874e-12, -1.4835428092324188e-11, -2.8054181643238021e-11, -5.0024687809912099e-11, -8.7703984424688670e-11, -1.5598100670271229e-10, -2.9033732972551867e-10, -5.8963006834672889e-10, -1.4061881325892009e-9, -4.7537078766049099e-9], [2.9098644913996510e-15, 2.7142151323814947e-14, 8.1074104630389776e-14, 1.7770926885566345e-13, 3.4299280085087777e-13, 6.2829234175506104e-13, 1.1402895529486016e-12, 2.1193715096526838e-12, 4.1742238774701915e-12, 9.1289926765079421e-12, 2.4110623265986710e-11, 9.5477371260206517e-11], [-3.3848321155257295e-17, -3.1721917477998806e-16, -9.5667146139961909e-16, -2.1281688390737262e-15, -4.1924627132948745e-15, -7.8894843581511039e-15, -1.4822943421079772e-14, -2.8792587160409403e-14, -6.0006959797401499e-14, -1.4132964438606490e-13, -4.1338372343301073e-13, -1.9176043719545283e-12], [3.9293880548013190e-19, 3.7001718618969312e-18, 1.1267752333556668e-17, 2.5442664856126438e-17, 5.1167863085918709e-17, 9.8940674087197191e-17, 1.9248444930046787e-16, 3.9084088445381968e-16, 8.6212947152534493e-16, 2.1871460353840037e-15, 7.0860852454272743e-15, 3.8510622447143241e-14], [-4.5076896962199334e-21, -4.2666852700186661e-20, -1.3129155602058506e-19, -3.0122799625050540e-19, -6.1923417949080740e-19, -1.2321094476929633e-18, -2.4856960870288973e-18, -5.2836755539342701e-18, -1.2351774002079881e-17, -3.3789953865196989e-17, -1.2136414638400788e-16, -7.7316867652654415e-16], [4.8475704143695030e-23, 4.6235279493602941e-22, 1.4444385933673969e-21, 3.3894724821858821e-21, 7.1780269768377977e-21, 1.4820833110967210e-20, 3.1267324201732733e-20, 7.0118240171675369e-20, 1.7487641136430050e-19, 5.1856758811565420e-19, 2.0723412196295838e-18, 1.5508757525159323e-17], [-3.4600944829944390e-25, -3.4047802782689380e-24, -1.1270743067303719e-23, -2.8572142851660610e-23, -6.6137944916630772e-23, -1.5007154379698778e-22, -3.4842314643701136e-22, -8.5987332061669961e-22, -2.3632607843004375e-21, -7.7710968864747398e-21, -3.5045456017162906e-20, -3.1032029481718053e-19], [-6.6878412557975322e-27, -5.8527566232310388e-26, -1.5120401245291719e-25, -2.5012912803309324e-25, -2.5783676394156453e-25, 1.0171234428674631e-25, 1.6496513310714333e-24, 7.0623454341122023e-24, 2.6423128959733661e-23, 1.0732424644778055e-22, 5.7603631891713932e-22, 6.1716570573423809e-21], [5.4980105404062722e-28, 5.0185481897414159e-27, 1.4323907406472599e-26, 2.9162525423399091e-26, 5.0343088558536284e-26, 7.7822227070599372e-26, 1.0674891125694114e-25, 1.1062979700098718e-25, -4.0097349034723904e-26, -1.0718859415190757e-24, -8.7310578421948683e-24, -1.2102757740597850e-22]],
        [[5.6002829756506224e-4, 5.0769734259386529e-3, 1.4312033226614639e-2, 2.8694705417215168e-2, 4.8944978335470455e-2, 7.6190312732195613e-2, 1.1218110414263310e-1, 1.5970410730083958e-1, 2.2344381118791876e-1, 3.1202393763607738e-1, 4.4395007711364680e-1, 6.7305893645471704e-1], [-1.2453580540833706e-5, -1.1340842652132672e-4, -3.2263688450833700e-4, -6.5603852539825587e-4, -1.1410425323929394e-3, -1.8223409570691891e-3, -2.7729092735247516e-3, -4.1162621496189867e-3, -6.0756226656169405e-3, -9.0984112429053126e-3, -1.4246784524732012e-2, -2.5025407151079829e-2], [1.3846770685041706e-7, 1.2666474812483456e-6, 3.6366097529900294e-6, 7.4994069550927674e-6, 1.3300425343594086e-5, 2.1793627328495766e-5, 3.4270592615107866e-5, 5.3046895189236300e-5, 8.2600611255957886e-5, 1.3265182114425118e-4, 2.2859650187661366e-4, 4.6524232061134280e-4], [-1.5395817882918568e-9, -1.4147060210366280e-8, -4.0990138148569823e-8, -8.5728356467546212e-8, -1.5503481153367738e-7, -2.6063300029020022e-7, -4.2355281045442170e-7, -6.8362338980008911e-7, -1.1229895836869089e-6, -1.9340195946568225e-6, -3.6679406852270018e-6, -8.6492265759586688e-6], [1.7118157451360087e-11, 1.5800710874752940e-10, 4.6202135718673991e-10, 9.7999094143723987e-10, 1.8071446192167394e-9, 3.1169459745876947e-9, 5.2347206432167071e-9, 8.8099581756913001e-9, 1.5267509027447961e-8, 2.8197364273966687e-8, 5.8853869373003106e-8, 1.6079603287938876e-7], [-1.9033169028426950e-13, -1.7647650294668986e-12, -5.2076832828587438e-12, -1.1202616626855271e-11, -2.1064756814382967e-11, -3.7275975178005891e-11, -6.4696283329604252e-11, -1.1353523768332089e-10, -2.0756807225022424e-10, -4.1110814913985087e-10, -9.4433846901209143e-10, -2.9893264755886902e-9], [2.1162334689558721e-15, 1.9710405841512079e-14, 5.8698303049806621e-14, 1.2806057233402238e-13, 2.4553796293422692e-13, 4.4578714286962495e-13, 7.9958398301250249e-13, 1.4631423895001115e-12, 2.8219686266860576e-12, 5.9938116874312267e-12, 1.5152348635340629e-11, 5.5573934807134227e-11], [-2.3528949294712745e-17, -2.2013597385268001e-16, -6.6159753974909619e-16, -1.4638601771817022e-15, -2.8620031816090599e-15, -5.3310970732797130e-15, -9.8819071785618950e-15, -1.8855407798433711e-14, -3.8365312125632030e-14, -8.7386931112280585e-14, -2.4312518713477565e-13, -1.0331605788127320e-12], [2.6154319470914934e-19, 2.4580514186006285e-18, 7.4554128044674240e-18, 1.6730171886183079e-17, 3.3353945915540758e-17, 6.3744343432427974e-17, 1.2211377744158753e-16, 2.4296511828293532e-16, 5.2154890371403270e-16, 1.2740009265950449e-15, 3.9009322276876618e-15, 1.9207001702937745e-14], [-2.9030814618548107e-21, -2.7408470421978666e-20, -8.3903521156390778e-20, -1.9097836951121478e-19, -3.8830397205892351e-19, -7.6152988906929485e-19, -1.5079439198453197e-18, -3.1291317931611756e-18, -7.0874970139670724e-18, -1.8569253341112139e-17, -6.2582850155432563e-17, -3.5705261180920208e-16], [3.1960938231865876e-23, 3.0321240850882345e-22, 9.3733587572807148e-22, 2.1657536245498990e-21, 4.4951396457147395e-21, 9.0557759832618636e-21, 1.8554722576254379e-20, 4.0196186230291166e-20, 9.6150853132602586e-20, 2.7038993562196571e-19, 1.0035476892743526e-18, 6.6364990900171084e-18], [-3.3707693283208141e-25, -3.2189303048498220e-24, -1.0081997384305484e-23, -2.3754668699949948e-23, -5.0602501353872065e-23, -1.0532299062665728e-22, -2.2456329174630346e-22, -5.1049438061520278e-22, -1.2951598325652696e-21, -3.9220469008612259e-21, -1.6065507155445521e-20, -1.2329418817715955e-19], [2.7984748168078063e-27, 2.7248023397036150e-26, 8.8533366354888392e-26, 2.1939833304331290e-25, 4.9640281108633381e-25, 1.1043388339517554e-24, 2.5267788408801519e-24, 6.1845202895272308e-24, 1.6973758606543771e-23, 5.6115107057141791e-23, 2.5580718395694489e-22, 2.2875950762035493e-21], [1.3418339108534750e-29, 1.0375986093985121e-28, 1.8010680542327226e-28, -5.8770137438965380e-29, -1.3921845428944174e-27, -5.8922838371333161e-27, -1.9481568047319318e-26, -6.1001374162175496e-26, -2.0051373548601958e-25, -7.6683264060920524e-25, -4.0080660118801878e-24, -4.2289661783148605e-23]],
        [[5.3617348065712467e-4, 4.8597808327240893e-3, 1.3694378495628636e-2, 2.7439543521378510e-2, 4.6763732448127791e-2, 7.2710639120286293e-2, 1.0689429957021198e-1, 1.5187156552365838e-1, 2.1191343454992586e-1, 2.9481986858881309e-1, 4.1715632645994226e-1, 6.2642953715301476e-1], [-1.1415355095494728e-5, -1.0391385287737829e-4, -2.9539331110968877e-4, -5.9990768141317161e-4, -1.0416193224907019e-3, -1.6597076321067143e-3, -2.5177432246472178e-3, -3.7224656113165389e-3, -5.4648617941254026e-3, -8.1229378550757047e-3, -1.2579382979269733e-2, -2.1679012129799302e-2], [1.2151881495109992e-7, 1.1109645878508374e-6, 3.1858769010796831e-6, 6.5578573844641226e-6, 1.1600558340609780e-5, 1.8942409648585508e-5, 2.9650930735780487e-5, 4.5619962431933189e-5, 7.0464419804503444e-5, 1.1190242996984011e-4, 1.8966615882452804e-4, 3.7512564386457680e-4], [-1.2935929072198733e-9, -1.1877553195266653e-8, -3.4360329924927387e-8, -7.1686852496109687e-8, -1.2919590764981185e-7, -2.1619162092396221e-7, -3.4919275515191781e-7, -5.5908668859001361e-7, -9.0857457056087647e-7, -1.5415794205391048e-6, -2.8596992283885333e-6, -6.4910360227266565e-6], [1.3770563894335826e-11, 1.2698538829947494e-10, 3.7058314130874508e-10, 7.8364083083294597e-10, 1.4388602709609466e-9, 2.4674166448823927e-9, 4.1123693923796058e-9, 6.8517795309912747e-9, 1.1715242262876213e-8, 2.1236957115745767e-8, 4.3117231443192458e-8, 1.1231849727797075e-7], [-1.4659049472297679e-13, -1.3576271219716717e-12, -3.9968143766214510e-12, -8.5663258073445869e-12, -1.6024647082231793e-11, -2.8160872856380992e-11, -4.8430505472263190e-11, -8.3970666374443954e-11, -1.5105738522420145e-10, -2.9256250771774822e-10, -6.5010180389603796e-10, -1.9435179059080502e-9], [1.5604855715130791e-15, 1.4514668555353846e-14, 4.3106440970402124e-14, 9.3642283287459301e-14, 1.7846711765204511e-13, 3.2140277907966050e-13, 5.7035570759963412e-13, 1.0290861634231768e-12, 1.9477471881648562e-12, 4.0303707559272159e-12, 9.8019354776320391e-12, 3.3629916346860535e-11], [-1.6611637738823754e-17, -1.5517884462820019e-16, -4.6491031350070247e-16, -1.0236424810872178e-15, -1.9875906316954594e-15, -3.6681936300321270e-15, -6.7169453902975258e-15, -1.2611746962967849e-14, -2.5114394839823844e-14, -5.5522750453326346e-14, -1.4778898887649726e-13, -5.8191949890921445e-13], [1.7682975393413109e-19, 1.6590074910501614e-18, 5.0140321563618841e-18, 1.1189642677211783e-17, 2.2135439681313356e-17, 4.1864736636022650e-17, 7.9102903266209468e-17, 1.5455905950767276e-16, 3.2382446825371869e-16, 7.6488259393609554e-16, 2.2282865334487050e-15, 1.0069304084174848e-14], [-1.8820480400804101e-21, -1.7733669796192667e-20, -5.4068373287940254e-20, -1.2230038718742623e-19, -2.4649028409413510e-19, -4.7775205236609030e-19, -9.3149216988721866e-19, -1.8940346529509088e-18, -4.1752106234696419e-18, -1.0536757315848751e-17, -3.3596474592203660e-17, -1.7423424865678854e-16], [2.0012059157662255e-23, 1.8938621448296732e-22, 5.8253968081012355e-22, 1.3356814819045234e-21, 2.7429670615656824e-21, 5.4489973462149643e-21, 1.0964227846321543e-20, 2.3202974534931087e-20, 5.3821333057278754e-20, 1.4513220821394610e-19, 5.0651101847361174e-19, 3.0147972722108963e-18], [-2.1167162272467240e-25, -2.0123038603612892e-24, -6.2469405004614556e-24, -1.4526687511165715e-23, -3.0416188076183377e-23, -6.1971566410333513e-23, -1.2877679360929192e-22, -2.8381649300644077e-22, -6.9311740214452870e-22, -1.9979435762964150e-21, -7.6344209250227158e-21, -5.2161496390326493e-20], [2.1796107953865703e-27, 2.0838708148839386e-26, 6.5430729537378324e-26, 1.5477124146632660e-25, 3.3156091495674826e-25, 6.9541402011034119e-25, 1.4976975626753111e-24, 3.4486019135929201e-24, 8.8900132019024872e-24, 2.7446106990156429e-23, 1.1496859103157622e-22, 9.0227747417810512e-22], [-1.9518144428398003e-29, -1.8971928685541847e-28, -6.1113124761481179e-28, -1.4956591460962200e-27, -3.3418965305537849e-27, -7.3555081219032614e-27, -1.6710581423315483e-26, -4.0800900267766015e-26, -1.1228291137508533e-25, -3.7416348901122779e-25, -1.7260414093422077e-24, -1.5592429691260515e-23]],
        [[5.1426826939422372e-4, 4.6604125907281444e-3, 1.3127840560599948e-2, 2.6289609264653245e-2, 4.4768649928165007e-2, 6.9534994993969667e-2, 1.0208349515121882e-1, 1.4477158525994682e-1, 2.0151500817050919e-1, 2.7941443666656567e-1, 3.9341389667593835e-1, 5.8584564054912639e-1], [-1.0501761780210735e-5, -9.5563666248074259e-5, -2.7146052380727543e-4, -5.5068491402456703e-4, -9.5464782326571226e-4, -1.5179146599739818e-3, -2.2962475467107738e-3, -3.3825978637430679e-3, -4.9417856823012364e-3, -7.2963507614856641e-3, -1.1188502939620525e-2, -1.8961720389696798e-2], [1.0722710990720722e-7, 9.7978603063366704e-7, 2.8066617523849955e-6, 5.7675614628065814e-6, 1.0178467163158920e-5, 1.6567664347734189e-5, 2.5825687041584474e-5, 3.9517313729933305e-5, 6.0594111454773642e-5, 9.5264824304941757e-5, 1.5909783447857922e-4, 3.0686141130953421e-4], [-1.0948308807201253e-9, -1.0045456641686476e-8, -2.9018400472173561e-8, -6.0406167628288401e-8, -1.0852294559907796e-7, -1.8083197242550990e-7, -2.9045915024247756e-7, -4.6166235163664105e-7, -7.4297967961531785e-7, -1.2438254473300792e-6, -2.2623331353795536e-6, -4.9660011757929856e-6], [1.1178653031110787e-11, 1.0299309846078517e-10, 3.0002459865812540e-10, 6.3265993964643548e-10, 1.1570730180620551e-9, 1.9737364036502976e-9, 3.2667676105674149e-9, 5.3933860066578148e-9, 9.1101064279119757e-9, 1.6240010460901734e-8, 3.2169835823146608e-8, 8.0365815861545906e-8], [-1.1413843499588803e-13, -1.0559578011718162e-12, -3.1019890187362634e-12, -6.6261213733317733e-12, -1.2336727123467398e-11, -2.1542846277013512e-11, -3.6741037748584405e-11, -6.3008413984505174e-11, -1.1170431883451933e-10, -2.1203774215193593e-10, -4.5744736697922220e-10, -1.3005764853230335e-9], [1.1653981904292056e-15, 1.0826423000936057e-14, 3.2071822389694791e-14, 6.9398235446596592e-14, 1.3153433750054486e-13, 2.3513485175590897e-13, 4.1322309768758208e-13, 7.3609791115903820e-13, 1.3696716707757867e-12, 2.7684713485951798e-12, 6.5047920435139865e-12, 2.1047495989801758e-11], [-1.1899169732371094e-17, -1.1100008622593688e-16, -3.3159419625534906e-16, -7.2683758336899881e-16, -1.4024204600652613e-15, -2.5664384396119821e-15, -4.6474817529649518e-15, -8.5994874682110446e-15, -1.6794339900315106e-14, -3.6146550930622184e-14, -9.2496581104605753e-14, -3.4061593530689446e-13], [1.2149491215250159e-19, 1.1380485087554429e-18, 3.4283833569795285e-18, 7.6124693799139441e-18, 1.4952597670683540e-17, 2.8011998711771983e-17, 5.2269734536224681e-17, 1.0046369517192002e-16, 2.0592501239404488e-16, 4.7194727635350199e-16, 1.3152787893312782e-15, 5.5122566310887670e-15], [-1.2404891084092465e-21, -1.1667877153995614e-20, -3.5445883764548533e-20, -7.9727514624960183e-20, -1.5942270593487842e-19, -3.0574065220264806e-19, -5.8786758104670385e-19, -1.1736622029987658e-18, -2.5249535235198225e-18, -6.1619601279716775e-18, -1.8702913711936995e-17, -8.9205906632037490e-17], [1.2664396331857339e-23, 1.1961371464845557e-22, 3.6644007853297084e-22, 8.3494025569439747e-22, 1.6996239601246444e-21, 3.3368492922113475e-21, 6.6113236029411654e-21, 1.3710774876666171e-20, 3.0959029372304919e-20, 8.0452204535750634e-20, 2.6594845015530747e-19, 1.4436323271635220e-18], [-1.2921666031589267e-25, -1.2255239737299509e-24, -3.7862532291684272e-24, -8.7397075611525980e-24, -1.8112557448633522e-23, -3.6406342166911768e-23, -7.4334006421152367e-23, -1.6014091374391537e-22, -3.7955080472643391e-22, -1.0503339667798480e-21, -3.7815655302988456e-21, -2.3362270263551926e-20], [1.3142550342624085e-27, 1.2518292836933447e-26, 3.9012313119998039e-26, 9.1256655067730114e-26, 1.9262183012216979e-25, 3.9655282652879552e-25, 8.3474229510723120e-25, 1.8688470959037269e-24, 4.6507441170044292e-24, 1.3708566740720321e-23, 5.3763960546283290e-23, 3.7805748990590638e-22], [-1.3244124988422464e-29, -1.2646426386824346e-28, -3.9774789445299784e-28, -9.4362555406405906e-28, -2.0321902126606001e-27, -4.2930373934202620e-27, -9.3301960092940013e-27, -2.1741344631136180e-26, -5.6871969059381078e-26, -1.7871519843925488e-25, -7.6391712339792341e-25, -6.1156412376711032e-24]],
        [[4.9408299696804710e-4, 4.4767605904706467e-3, 1.2606324766407082e-2, 2.5232199675768805e-2, 4.2936868607303075e-2, 6.6625193930193023e-2, 9.7687160590065757e-2, 1.3830596096349185e-1, 1.9208960053740687e-1, 2.6553950779147886e-1, 3.7222945529572857e-1, 5.5020261336514992e-1], [-9.6936203388084711e-6, -8.8181064095370068e-5, -2.5032296444706248e-4, -5.0728135108066761e-4, -8.7813216351047761e-4, -1.3935472909558587e-3, -2.1027480810173089e-3, -3.0872420638881045e-3, -4.4903767958973989e-3, -6.5898189407823890e-3, -1.0016206320219905e-2, -1.6725150979092621e-2], [9.5091589722359760e-8, 8.6847396771044229e-7, 2.4853233472352810e-6, 5.0993249193677434e-6, 8.9796499093137733e-6, 1.4573871666062842e-5, 2.2631170081687847e-5, 3.4456445313863681e-5, 5.2484579364843641e-5, 8.1768837401013599e-5, 1.3476148598920657e-4, 2.5420696710485131e-4], [-9.3282077488829335e-10, -8.5533900087045423e-9, -2.4675451387183539e-8, -5.1259748811729516e-8, -9.1824574755860035e-8, -1.5241516144964383e-7, -2.4357166885070605e-7, -3.8456544679603989e-7, -6.1345209907995726e-7, -1.0146170676301487e-6, -1.8131273982795173e-6, -3.8637129318235684e-6], [9.1506998736114707e-12, 8.4240268977900439e-11, 2.4498941026415693e-10, 5.1527641202762600e-10, 9.3898454997294235e-10, 1.5939746123603647e-9, 2.6214799169484669e-9, 4.2921021457981446e-9, 7.1701723137906784e-9, 1.2589732551421706e-8, 2.4394439837478282e-8, 5.8724895660767566e-8], [-8.9765698211463992e-14, -8.2966202981111366e-13, -2.4323693289689543e-12, -5.1796933638741913e-12, -9.6019174312738607e-12, -1.6669962754094476e-11, -2.8214106289880033e-11, -4.7903785900429772e-11, -8.3806659202594298e-11, -1.5621791783403595e-10, -3.2821118665607954e-10, -8.9256459552561361e-10], [8.8057532994821772e-16, 8.1711406053949279e-15, 2.4149699106069420e-14, 5.2067633356284693e-14, 9.8187790432254519e-14, 1.7433631355697520e-13, 3.0365893233231452e-13, 5.3465006728147328e-13, 9.7955192884820305e-13, 1.9384079633701440e-12, 4.4158662263133145e-12, 1.3566163855286402e-11], [-8.6381871072851891e-18, -8.0475585417685500e-17, -2.3976949121682669e-16, -5.2339746914312961e-16, -1.0040538371040055e-15, -1.8232284169251461e-15, -3.2681788721128152e-15, -5.9671837242682945e-15, -1.1449233064588023e-14, -2.4052461215301935e-14, -5.9412583246351437e-14, -2.0619325733775801e-13], [8.4738081210409157e-20, 7.9258442438423659e-19, 2.3805431101012298e-18, 5.2613274837721138e-18, 1.0267304816986117e-17, 1.9067521877342634e-17, 3.5174305614381476e-17, 6.6599222456360349e-17, 1.3382131764166587e-16, 2.9845155237424482e-16, 7.9935731138861068e-16, 3.1339484964201336e-15], [-8.3125460099778653e-22, -7.8059606122966096e-21, -2.3635110846662255e-20, -5.2888172253177374e-20, -1.0499182219428653e-19, -1.9941005364010977e-19, -3.7856890519552989e-19, -7.4330776186710926e-19, -1.5641342730389960e-18, -3.7032927509794889e-18, -1.0754826299327729e-17, -4.7633141088820195e-17], [8.1542757087723859e-24, 7.6878198436786349e-23, 2.3465807270609886e-22, 5.3164090981161161e-22, 1.0736223086668896e-21, 2.0854383810681284e-21, 4.0743877871947561e-21, 8.2959606686964649e-21, 1.8281916581835124e-20, 4.5951701410984484e-20, 1.4469899102716114e-19, 7.2397980732313165e-19], [-7.9985324612483348e-26, -7.5710263298898298e-25, -2.3296452194181837e-24, -5.3438850344163760e-24, -1.0978156614230320e-23, -2.1808850557892355e-23, -4.3849861302469444e-23, -9.2588344347080263e-23, -2.1367997658239622e-22, -5.7017982389616524e-22, -1.9468208259650623e-21, -1.1003811127047632e-20], [7.8425518132543433e-28, 7.4539149981291129e-27, 2.3122196341918985e-26, 5.3702044206165473e-26, 1.1223253697156621e-25, 2.2803210574131554e-25, 4.7186689852484844e-25, 1.0332540706574224e-24, 2.4973595130584996e-24, 7.0747022640259993e-24, 2.6192685221684273e-23, 1.6724678593080612e-22], [-7.7885707482416611e-30, -7.3677495527360661e-29, -2.3023116820903414e-28, -5.4131353580228251e-28, -1.1498492901708984e-27, -2.3878537865002448e-27, -5.0820673402638212e-27, -1.1536865350027235e-26, -2.9193262825098952e-26, -8.7780553575675604e-26, -3.5234708989968059e-25, -2.5413992508142730e-24]],
        [[4.7542271327039675e-4, 4.3070366094121165e-3, 1.2124668480179728e-2, 2.4256577709061342e-2, 4.1249123306155462e-2, 6.3949188765855891e-2, 9.3653934650252699e-2, 1.3239329368608450e-1, 1.8350671001633338e-1, 2.5297773555306283e-1, 3.5321061253505155e-1, 5.1864959378506983e-1], [-8.9753033985376333e-6, -8.1622117186454516e-5, -2.3156166555791716e-4, -4.6881451992335161e-4, -8.1046094798393244e-4, -1.2838626270623549e-3, -1.9327175764761904e-3, -2.8289507407104393e-3, -4.0981151701741492e-3, -5.9811675456927741e-3, -9.0189733412449161e-3, -1.4862231039440038e-2], [8.4720469644437034e-8, 7.7340531532057827e-7, 2.2112276737137543e-6, 4.5304629681716848e-6, 7.9619504071859217e-6, 1.2887600898289428e-5, 1.9942553638401326e-5, 3.0224198184621877e-5, 4.5760037729728357e-5, 7.0706548802482847e-5, 1.1514642715047846e-4, 2.1294329940344125e-4], [-7.9970087450672549e-10, -7.3283541567501604e-9, -2.1115445914662542e-8, -4.3780842601312850e-8, -7.8218024500969224e-8, -1.2936762346110290e-7, -2.0577525162554492e-7, -3.2291200506158802e-7, -5.1096198278320179e-7, -8.3585955507265240e-7, -1.4700896858056312e-6, -3.0510122363520349e-6], [7.5486065099781561e-12, 6.9439365857554023e-11, 2.0163552648829226e-10, 4.2308306951094328e-10, 7.6841214073737252e-10, 1.2986111326729076e-9, 2.1232714199648267e-9, 3.4499563024270885e-9, 5.7054618134635897e-9, 9.8811384184179705e-9, 1.8768829722237162e-8, 4.3714339415446827e-8], [-7.1253467463148711e-14, -6.5796840975682304e-13, -1.9254571135335088e-12, -4.0885298927473972e-12, -7.5488638557988770e-12, -1.3035648555413327e-11, -2.1908764475762639e-11, -3.6858953219481131e-11, -6.3707860078711253e-11, -1.1681016966414432e-10, -2.3962413486891149e-10, -6.2633097558733709e-10], [6.7258196836288186e-16, 6.2345389079720297e-15, 1.8386566892132875e-14, 3.9510152701875283e-14, 7.4159871358258324e-14, 1.3085374749064291e-13, 2.2606340211533629e-13, 3.9379699718924162e-13, 7.1136948563298424e-13, 1.3808748707352086e-12, 3.0593130663554929e-12, 8.9739544555906493e-12], [-6.3486945919749999e-18, -5.9074987136164083e-17, -1.7557692625925585e-16, -3.8181258436573397e-16, -7.2854493321037199e-16, -1.3135290616414102e-15, -2.3326126759432461e-15, -4.2072837488175894e-15, -7.9432356409122528e-15, -1.6324053061796865e-14, -3.9058655089777439e-14, -1.2857716079116825e-13], [5.9927152958242873e-20, 5.5976137321945748e-19, 1.6766184159857332e-18, 3.6897060110142004e-18, 7.1572092089747534e-18, 1.3185396774352484e-17, 2.4068831146278962e-17, 4.4950155937721028e-17, 8.8695106290748321e-17, 1.9297527464995589e-16, 4.9866702130613128e-16, 1.8422297929272961e-15], [-5.6566955873280833e-22, -5.3039835756597199e-21, -1.6010355621487810e-20, -3.5656051518543233e-20, -7.0312258120615156e-20, -1.3235693118215763e-19, -2.4835181781717541e-19, -4.8024249015222804e-19, -9.9037998665875768e-19, -2.2812628465945969e-18, -6.3665478018384974e-18, -2.6395127779561316e-17], [5.3395126777632759e-24, 5.0257521569790861e-23, 1.5288588782223797e-22, 3.4456759924332426e-22, 6.9074558640735646e-22, 1.3286174585914394e-21, 2.5625922529335526e-21, 5.1308560091741948e-21, 1.1058696961171721e-20, 2.6968011590092699e-20, 8.1282551397741226e-20, 3.7818449757818691e-19], [-5.0400841804964613e-26, -4.7620901785771542e-25, -1.4599284943419413e-24, -3.3297646668659948e-24, -6.7858368678425278e-24, -1.3336803022929983e-23, -2.6441769855618448e-23, -5.4817373619290390e-23, -1.2348252178396832e-22, -3.1880283883211969e-22, -1.0377445815727472e-21, -5.4185565927284563e-21], [4.7577975250490852e-28, 4.5125203317956599e-27, 1.3941334519343697e-26, 3.2178185709238350e-26, 6.6664860163190960e-26, 1.3387823221794435e-25, 2.7283864447056754e-25, 5.8566521169886333e-25, 1.3788204502990683e-24, 3.7687374461497111e-24, 1.3249015820383820e-23, 7.7636050938412952e-23], [-4.5066760698661319e-30, -4.3052788242530667e-29, -1.3414861429320885e-28, -3.1317777937274169e-28, -6.5820581779378173e-28, -1.3488253667110197e-27, -2.8234740478047907e-27, -6.2676407599997283e-27, -1.5408651020059476e-26, -4.4569119770384241e-26, -1.6915499312888144e-25, -1.1121701378939220e-24]],
    ],
    [
        [[3.3628458359029377e-3, 3.0841317640881481e-2, 8.9028530789848147e-2, 1.8522715718090684e-1, 3.3289435777566835e-1, 5.5606796463595322e-1, 8.9893637965636930e-1, 1.4481420272217889e+0, 2.3911186134179604e+0, 4.1958309606622352e+0, 8.3166576812884254e+0, 21.349686685746259e+0, 115.18326946701403e+0], [-1.5499444308821934e-4, -1.4231787078749327e-3, -4.1178307085156300e-3, -8.5962351565917719e-3, -1.5515305563206538e-2, -2.6045403641362018e-2, -4.2332493954853988e-2, -6.8575103519398462e-2, -1.1384129056442593e-1, -2.0074847438451602e-1, -3.9955324761448131e-1, -1.0288321236820114e+0, -5.5604830878364849e+0], [2.6730725664343704e-6, 2.4156764896142745e-5, 6.7691018494062846e-5, 1.3461641538024459e-4, 2.2758320449745340e-4, 3.5175217897450935e-4, 5.1750023533486854e-4, 7.4687771498370173e-4, 1.0906533885052960e-3, 1.6808779975595388e-3, 2.9369871042557275e-3, 6.7776488939951708e-3, 3.4156879983983352e-2], [-4.0849664795933069e-8, -3.5387214948342727e-7, -9.0843645455111295e-7, -1.5712169737224217e-6, -2.1666569505252579e-6, -2.5065962694381915e-6, -2.4284122908661589e-6, -1.8371021213266709e-6, -7.4253654030804794e-7, 7.2056570712440301e-7, 2.3024593642272496e-6, 3.6821133887431528e-6, 4.4908337767359822e-6], [5.8267130435425963e-10, 4.6601677506129546e-9, 9.9888269287251363e-9, 1.2204213512951752e-8, 7.5641559420571427e-9, -4.8054096431433349e-9, -2.1589291069511085e-8, -3.5799137781244983e-8, -3.9444435978127286e-8, -2.7591487156756418e-8, -1.8871103920741071e-9, 2.8745403021837924e-8, 5.0848644396210648e-8], [-7.9351558592496579e-12, -5.5549171751877226e-11, -8.2146817389321302e-11, -1.5091758018893995e-11, 1.4161777439229220e-10, 2.7910091397822511e-10, 2.4857004677920670e-10, -9.1440436379017715e-12, -3.6892320901214784e-10, -5.6751212750743649e-10, -3.9867292135006984e-10, 8.4239883720024851e-11, 5.4985974598657559e-10], [1.0435076723685845e-13, 5.9005613153057315e-13, 2.8623509244310252e-13, -1.3094233624144670e-12, -2.4977809309079988e-12, -9.1716157005976687e-13, 3.0682505687189590e-12, 5.3676270106235776e-12, 2.1796942768322086e-12, -4.5599437709061889e-12, -7.6586335495656117e-12, -2.6689531648175490e-12, 5.5436091137663170e-12], [-1.3334262191842832e-15, -5.3067933280783105e-15, 5.7217784123394184e-15, 2.2207043088616405e-14, 5.4459389007620162e-15, -4.1256808404591284e-14, -4.6601537093131687e-14, 2.6098170938211934e-14, 8.6400444245621301e-14, 2.7286349263829982e-14, -8.4023567389964713e-14, -7.4746644518802668e-14, 4.9601876624887878e-14], [1.6610283720944161e-17, 3.3832013065834801e-17, -1.5072228925277069e-16, -1.3867524996763525e-16, 3.7893152505076092e-16, 4.5376488521310013e-16, -5.3189701318739838e-16, -9.2999726763395066e-16, 4.5289027516694448e-16, 1.2586252005199104e-15, -3.0296554731438148e-16, -1.2610746765178918e-15, 3.4130778153420291e-16], [-2.0202596777225110e-19, 1.3096461389515941e-20, 2.0304912067718114e-18, -1.6435324932330140e-18, -5.6666139621549823e-18, 5.0628718727140390e-18, 1.0442121425484910e-17, -9.5712950235147990e-18, -1.3161096849649462e-17, 1.3978682986924402e-17, 9.5165889836525980e-18, -1.6059389943253113e-17, 4.9905767470386359e-19], [2.3992119992077983e-21, -5.1918252556236722e-21, -1.5240747221744732e-20, 5.3438248511135115e-20, -5.3042669098167984e-21, -1.3343645087273160e-19, 9.9697088732350714e-20, 1.6227211580008754e-19, -2.3327095537471614e-19, -4.3254770844685428e-20, 2.4738640930922291e-19, -1.4763911491205304e-19, -4.2261154057579694e-20], [-2.7791748005196130e-23, 1.1230438529586959e-22, -4.5164602412395787e-23, -5.9573069008225105e-22, 1.2554379409768303e-21, -1.1669108234145610e-22, -2.5421992855961332e-21, 2.9109867208958267e-21, 5.4182843297834049e-22, -3.6906779700634219e-21, 3.0641890640736306e-21, -5.2368590515436941e-22, -1.1192313373385277e-21], [3.1317029223754303e-25, -1.6967437069679782e-24, 3.6763754138253420e-24, -3.6963475124876900e-25, -1.5128528541114966e-23, 3.1348390248173345e-23, -1.9064219382301501e-23, -2.5442845884612094e-23, 5.9836976699190511e-23, -4.9011131066478360e-23, 1.1175138816658891e-23, 1.4952706095615156e-23, -2.0692209212734848e-23], [-3.4177152199667455e-27, 2.0308519664821002e-26, -6.8189164820908018e-26, 1.2912740193706208e-25, -8.0685820330155403e-26, -2.1592993703188617e-25, 6.4733768110255185e-25, -8.2086521753465832e-25, 5.0118181497097398e-25, 5.5000283867329196e-26, -4.1899783508738884e-25, 4.4428646182047385e-25, -3.2747374208598693e-25]],
        [[3.0727936857014089e-3, 2.8175609295495085e-2, 8.1301714149363464e-2, 1.6905423366262930e-1, 3.0360366042349690e-1, 5.0669527513956628e-1, 8.1831523284082177e-1, 1.3168901786655128e+0, 2.1721251141949697e+0, 3.8078025278218366e+0, 7.5411337712282306e+0, 19.346389136760614e+0, 104.33573932785940e+0], [-1.3542339616398412e-4, -1.2457225639383426e-3, -3.6173127541476300e-3, -7.5914357241843634e-3, -1.3796387563478648e-2, -2.3352595262402813e-2, -3.8314526655565871e-2, -6.2697967516156456e-2, -1.0516297221190163e-1, -1.8727526774250910e-1, -3.7594802092681044e-1, -9.7442627079557328e-1, -5.2869977719248948e+0], [2.2339843495589166e-6, 2.0323372395277948e-5, 5.7695827616314605e-5, 1.1691847930545673e-4, 2.0239259290950855e-4, 3.2139103879842648e-4, 4.8646244709372050e-4, 7.2141293538555646e-4, 1.0777243067703237e-3, 1.6864831035870875e-3, 2.9641377570647482e-3, 6.8246359804599222e-3, 3.4216039126691840e-2], [-3.2672169082814135e-8, -2.8747622621246247e-7, -7.6133997470388399e-7, -1.3798699028328885e-6, -2.0261546295292346e-6, -2.5403841045457201e-6, -2.7305423174646115e-6, -2.4041676261293065e-6, -1.4289871357200240e-6, 1.8270122309034525e-7, 2.1976762353319488e-6, 4.1512370266773375e-6, 5.4001130035057823e-6], [4.4627229062919026e-10, 3.6793915618599837e-9, 8.4250184328244480e-9, 1.1635708405156313e-8, 9.8156795751967878e-9, 4.7198045195884787e-10, -1.5995586316526167e-8, -3.4653146644258378e-8, -4.6097439394121886e-8, -3.9948807414163471e-8, -1.1893254745572204e-8, 2.9594141528877279e-8, 6.3295200150494990e-8], [-5.8248185451486127e-12, -4.3049353007901164e-11, -7.3836379539234333e-11, -3.9598985698238968e-11, 8.4683559105349010e-11, 2.4499935749317659e-10, 3.0499582616918719e-10, 1.2481724776236762e-10, -2.8644238539154095e-10, -6.6278694143095412e-10, -6.1141607881731424e-10, -1.0065687117823944e-11, 7.0080895177261759e-10], [7.3482273076648304e-14, 4.5645732798481778e-13, 3.8906218818489261e-13, -7.5600102629476086e-13, -2.2059316555311639e-12, -1.8489457725139949e-12, 1.5857929515439387e-12, 5.6401882394627121e-12, 4.7182669210513821e-12, -3.1608282803067261e-12, -1.0080344756709570e-11, -5.4220424456260247e-12, 7.0850863701357014e-12], [-9.0189303322435721e-16, -4.2483329612585796e-15, 1.9493196129437229e-15, 1.7184565536184203e-14, 1.4361736147200161e-14, -2.4835735137830945e-14, -5.7067786129445758e-14, -7.6989938377318503e-15, 9.1611621661560542e-14, 7.4922365372325072e-14, -8.6057858078425029e-14, -1.2551951984823812e-13, 6.0368249616784624e-14], [1.0806133779404121e-17, 3.1563361993970205e-17, -8.8687629427757947e-17, -1.6558283990133017e-16, 1.8242467577486564e-16, 5.4239074769583009e-16, -1.1269967392237198e-16, -1.1311918482328050e-15, -1.7488472634194528e-16, 1.6855318724635917e-15, 2.5094963126958186e-16, -1.9484212324205035e-15, 3.1379311165918819e-16], [-1.2665467009359037e-19, -1.1632615708248637e-19, 1.4219069906252844e-18, -1.5904832495257689e-20, -4.9941490950525009e-18, 1.5563217759027844e-20, 1.2047241597125226e-17, -1.0200064937589981e-18, -2.1101125986372486e-17, 8.3484648126269904e-18, 2.2162714764093143e-17, -2.2113400273105393e-17, -2.5415535211813547e-18], [1.4526055290848744e-21, -1.7143058650626392e-21, -1.4416586513887296e-20, 2.8677299118788837e-20, 3.3503063304946660e-20, -1.1061134929578575e-19, -2.0033536703026427e-20, 2.4979079352723543e-19, -1.4012532360033762e-19, -2.5262254280346975e-19, 3.8305079203866652e-19, -1.4438529536330879e-19, -1.2088195720975912e-19], [-1.6300176857848994e-23, 5.2224414025280420e-23, 6.2246871203035424e-23, -4.9894354667973797e-22, 5.1773714586347600e-22, 1.0191187164182589e-21, -2.6270017030834259e-21, 8.0298064271891791e-22, 3.7475008489848375e-21, -5.6232710278612182e-21, 2.7731592821701122e-21, 9.6681403427449762e-22, -2.6612615968185953e-21], [1.7860611552805502e-25, -8.8170879134218585e-25, 1.1024390315031532e-24, 3.5526759947354831e-24, -1.4109891612253628e-23, 1.4659998580566409e-23, 1.4808972934017927e-23, -5.8098933109258611e-23, 6.6276369833196769e-23, -2.3078759575630838e-23, -3.0581629168517685e-23, 5.2389884530857051e-23, -4.6996506532288731e-23], [-1.9057136228407126e-27, 1.1603136709466739e-26, -3.3121733785892075e-26, 3.0833248299845920e-26, 9.3034423551655059e-26, -3.6949489747971481e-25, 5.6661647472607653e-25, -3.2899241202295241e-25, -3.5582134602068895e-25, 1.0263242656883009e-24, -1.2599037258359419e-24, 1.0542860039459348e-24, -7.3050503245170249e-25]],
        [[2.8186574412662854e-3, 2.5836492676011353e-2, 7.4501270081871649e-2, 1.5475646580544494e-1, 2.7755499029479643e-1, 4.6246500394195562e-1, 7.4547135976159425e-1, 1.1971676901059434e+0, 1.9703575527606231e+0, 3.4467424510918806e+0, 6.8130313907763536e+0, 17.452297069134752e+0, 94.035690195798222e+0], [-1.1900667055080462e-4, -1.0959954096772536e-3, -3.1901077114634154e-3, -6.7192225590365420e-3, -1.2271721627319697e-2, -2.0902921306965180e-2, -3.4557769590516280e-2, -5.7051252891306405e-2, -9.6622698811529877e-2, -1.7378652954892791e-1, -3.5213368409442006e-1, -9.1962194168476101e-1, -5.0129919090070424e+0], [1.8812045913359653e-6, 1.7200289092866920e-5, 4.9321499139383617e-5, 1.0144816099956154e-4, 1.7906801358891474e-4, 2.9110506765633014e-4, 4.5236686754563392e-4, 6.8934204834523220e-4, 1.0559843203057223e-3, 1.6843918610779432e-3, 2.9889198289895966e-3, 6.8772587248473852e-3, 3.4287410899584118e-2], [-2.6375895810211982e-8, -2.3493708149498839e-7, -6.3783280773856774e-7, -1.2008673436018102e-6, -1.8582843595769432e-6, -2.4962449704336015e-6, -2.9361500741044277e-6, -2.9314390428246710e-6, -2.2053728612220709e-6, -5.6582163610050478e-7, 1.8956203943034200e-6, 4.6147309464470744e-6, 6.5347982500982809e-6], [3.4555159467327357e-10, 2.9188910756594001e-9, 7.0446161174312618e-9, 1.0698191951782806e-8, 1.1015240395927898e-8, 4.8819279336625066e-9, -9.6449521600708188e-9, -3.0841647632066258e-8, -5.0492486933731129e-8, -5.3760836699774030e-8, -2.6727817853736145e-8, 2.7767190016436346e-8, 7.9154078359062422e-8], [-4.3290493241157830e-12, -3.3411927816631590e-11, -6.4121144311638373e-11, -5.2561363005374481e-11, 3.7070406372217457e-11, 1.9421348551050074e-10, 3.2386245927371005e-10, 2.5354030747708802e-10, -1.4378647484637658e-10, -7.0718225929970847e-10, -8.8050413423830858e-10, -1.9018718161854935e-10, 8.9214503154096993e-10], [5.2457471792794611e-14, 3.5094319656227617e-13, 4.1084759514140774e-13, -3.4775519922951587e-13, -1.7470583114977852e-12, -2.3068020424259588e-12, 2.7140900129196161e-16, 4.9262223143411269e-12, 7.0852591170281012e-12, -2.7946655764052657e-13, -1.2235301994327971e-11, -9.9363686233112130e-12, 8.8940198010664133e-12], [-6.1910085102119819e-16, -3.3147140391725732e-15, -1.7489457580695686e-16, 1.2058368163868446e-14, 1.7614756509057428e-14, -8.2268296927600308e-15, -5.4099319127695632e-14, -4.2537861195858289e-14, 7.3153877820388946e-14, 1.3122351231607865e-13, -6.2102530324897149e-14, -2.0158448644480722e-13, 6.7737395661543321e-14], [7.1402070903826945e-18, 2.6595997377976469e-17, -4.7116229806129413e-17, -1.5031394091718464e-16, 3.0576356169159257e-17, 4.7551110966354662e-16, 2.8130935185452099e-16, -9.8727844539467694e-16, -9.8790250049942527e-16, 1.7432690432288031e-15, 1.3481115654528573e-15, -2.8298275822386708e-15, 9.9839506476700827e-17], [-8.0686940441432034e-20, -1.4948816643517846e-19, 9.1040789687896729e-19, 7.4573830771627046e-19, -3.3778943119472304e-18, -3.3713783489657241e-18, 9.2338797936610225e-18, 8.8275260354613142e-18, -2.2580793651714979e-17, -6.7959088051828000e-18, 3.9219760119248529e-17, -2.6069301058931215e-17, -1.0544362913656657e-17], [8.9355101155985588e-22, -1.6365681140918043e-22, -1.1007017931373555e-20, 1.0768333249014972e-20, 4.3394632733146824e-20, -5.6787495721756674e-20, -1.1139940024731327e-19, 2.2156699369887472e-19, 8.2964793839593042e-20, -5.0009636060565711e-19, 4.4475759344068160e-19, -2.3050937780396235e-20, -3.0431165880587397e-19], [-9.7077820294505882e-24, 2.1817039863817474e-23, 8.3864111053270876e-23, -3.1354633203221732e-22, -1.8604768309216719e-23, 1.2915831924412609e-21, -1.3776671473758543e-21, -2.0480863026371063e-21, 6.0126634468964120e-21, -4.9604921581563213e-21, -7.0753206137735009e-22, 5.1751787620491577e-21, -6.1370767233489564e-21], [1.0321235625462313e-25, -4.3202281610110612e-25, -2.4073217466969491e-26, 3.7877782945134457e-24, -7.9799318729862736e-24, -2.2669495833336216e-24, 3.3323065063011941e-23, -5.3367625783447581e-23, 1.8726349805817682e-23, 6.0131680708495957e-23, -1.2330562378297145e-22, 1.3143671154789542e-22, -1.0548820401992602e-22], [-1.0760458938517446e-27, 6.1648141496843573e-27, -1.2452704687385071e-26, -1.4104269513276533e-26, 1.2425708740264258e-25, -2.5255370611209190e-25, 1.1955254635273453e-25, 5.0678768595230455e-25, -1.4228260416470871e-24, 2.0953822535565743e-24, -2.2657671935311104e-24, 2.0290331913179056e-24, -1.6679494668929023e-24]],
        [[2.5947537241842566e-3, 2.3773705289811576e-2, 6.8492679502847533e-2, 1.4208597287156974e-1, 2.5437561960124905e-1, 4.2289426401792332e-1, 6.7986165299174336e-1, 1.0884628833915853e+0, 1.7854664266403044e+0, 3.1126119975386768e+0, 6.1327413339591297e+0, 15.668251696776701e+0, 84.284270128241902e+0], [-1.0513525000755961e-4, -9.6892410127414039e-4, -2.8243295604295164e-3, -5.9624513033857097e-3, -1.0925336640561106e-2, -1.8692297247222184e-2, -3.1081903477390075e-2, -5.1685189647101778e-2, -8.8294571467937094e-2, -1.6035424768276684e-1, -3.2814005019110741e-1, -8.6437519570420651e-1, -4.7383559869650077e+0], [1.5952161462509513e-6, 1.4640605973447228e-5, 4.2303192919530040e-5, 8.8028910750938591e-5, 1.5784361132438651e-4, 2.6173708712960867e-4, 4.1641954638012135e-4, 6.5139087485796983e-4, 1.0246093241062241e-3, 1.6719767175614010e-3, 3.0084672231239090e-3, 6.9351279407256391e-3, 3.4374055420103946e-2], [-2.1476775076035834e-8, -1.9315299245340510e-7, -5.3484695846152980e-7, -1.0384542044406696e-6, -1.6782190530604369e-6, -2.3901169889043504e-6, -3.0391440739254675e-6, -3.3783800294931962e-6, -3.0263964463809951e-6, -1.5381502776250708e-6, 1.3106541866442673e-6, 5.0135047657778473e-6, 7.9562504336562110e-6], [2.7027916338102487e-10, 2.3278370072253302e-9, 5.8596375017627215e-9, 9.5881568604851098e-9, 1.1377442562714614e-8, 8.2022687787556695e-9, -3.2838944677050998e-9, -2.4702021793845822e-8, -5.1523365498512101e-8, -6.7642853388852700e-8, -4.7384056024265480e-8, 2.1064979612552030e-8, 9.9285196203384930e-8], [-3.2547254278693018e-12, -2.6011841260262161e-11, -5.4462515962405348e-11, -5.7372243760491948e-11, 1.0695932849254153e-12, 1.3768034233450957e-10, 3.0698281638353911e-10, 3.5425658327953446e-10, 4.6551902687875724e-11, -6.6386818003815403e-10, -1.1887193880818018e-9, -5.0748528618273236e-10, 1.1282726276059500e-9], [3.7929521369879065e-14, 2.6923743690011283e-13, 3.8920513279464274e-13, -7.2974009594279910e-14, -1.2560781418840334e-12, -2.3448687743163697e-12, -1.3451869942508930e-12, 3.3516078790045606e-12, 8.5763722097041742e-12, 4.1093192670954110e-12, -1.3134423580178601e-11, -1.6987656060720911e-11, 1.0758022551493813e-11], [-4.3094740871025059e-16, -2.5494559191977466e-15, -1.2360755398683988e-15, 7.7370881197500078e-15, 1.6975103535648474e-14, 4.7167566454042573e-15, -4.0728720404516203e-14, -6.7552398145589874e-14, 2.9696725619226466e-14, 1.7887330215359383e-13, 6.8781672380696493e-15, -3.0675970885849064e-13, 6.1878019887874580e-14], [4.7878350484734729e-18, 2.1279899169927492e-17, -2.1394385086819012e-17, -1.1857536811039384e-16, -6.0844184370925348e-17, 3.2635926323096990e-16, 5.2325375967261988e-16, -5.3769372094225439e-16, -1.6769989808679621e-15, 1.0966464332420458e-15, 3.0536669570322733e-15, -3.7101191578806504e-15, -5.8007922140174926e-16], [-5.2207934752570571e-20, -1.4193520783061690e-19, 5.4175427507057885e-19, 9.5076718258902941e-19, -1.7492188419410835e-18, -4.5778817564184540e-18, 4.0411461965100570e-18, 1.5252706589420526e-17, -1.3993240411088075e-17, -2.9911291421231590e-17, 5.4206423060182976e-17, -2.0164793544659321e-17, -2.9966744478294048e-17], [5.5818226011844214e-22, 4.3650180561838932e-22, -7.5141437035450080e-21, 6.3338929681503423e-22, 3.6297202864215489e-20, -6.0981947533782448e-21, -1.3673652127864942e-19, 8.7358421594408662e-20, 3.3853457537940718e-19, -6.1472996416000973e-19, 2.3974943116986595e-19, 3.8545586922635729e-19, -7.2282331998842282e-19], [-5.8746332434206185e-24, 7.3034741240811858e-24, 7.2106304921741792e-23, -1.5600578331405969e-22, -2.5944692326165158e-22, 9.4780098942606195e-22, 1.8538663929091967e-22, -3.7234578435382050e-21, 4.9237633587828614e-21, 6.5132886830842068e-22, -9.6023187697055234e-21, 1.4432720663941197e-20, -1.3907681329515180e-20], [6.0443151181567773e-26, -1.9907606465985804e-25, -3.8275722701829046e-25, 2.6919806266241408e-24, -2.4062149748469240e-24, -1.0417674800854506e-23, 2.8428555488462828e-23, -1.2640997446074615e-23, -6.5584333264704924e-23, 1.7156270840447567e-22, -2.4590663520228886e-22, 2.6132289219380764e-22, -2.3523635294008629e-22], [-6.1588642367407372e-28, 3.0924333560795189e-27, -2.7419959857369634e-27, -2.4240963103743988e-26, 8.4582567813117138e-26, -6.4795795116288562e-26, -2.6780272549325915e-25, 9.4094923074868174e-25, -1.5841165423285752e-24, 1.8229169093357989e-24, -2.0573077692716672e-24, 2.8068590594190258e-24, -3.6558140360667939e-24]],
        [[2.3964776589353298e-3, 2.1946064368593489e-2, 6.3163194258136094e-2, 1.3082762354589590e-1, 2.3372610220318882e-1, 3.8751444223727179e-1, 6.2091338375585864e-1, 9.9017088069874292e-1, 1.6169493557364003e+0, 2.8052072408043337e+0, 5.5005684180260011e+0, 13.995176277967584e+0, 75.082873187542865e+0], [-9.3335535128662247e-5, -8.6047479755856213e-4, -2.5100623986892044e-3, -5.3055453288099990e-3, -9.7400558319139963e-3, -1.6710705437775290e-2, -2.7896865805620116e-2, -4.6642380286487689e-2, -8.0256833899221331e-2, -1.4707162958249704e-1, -3.0402420638302542e-1, -8.0864872507714182e-1, -4.4629528291733996e+0], [1.3614432348859180e-6, 1.2530148747186308e-5, 3.6413218321585191e-5, 7.6449933003322943e-5, 1.3879304802248203e-4, 2.3392423490740524e-4, 3.7983051574348885e-4, 6.0872506010617200e-4, 9.8341377333900227e-4, 1.6466091985504319e-3, 3.0188068778796271e-3, 6.9968969632156663e-3, 3.4479853392385078e-2], [-1.7627416397789474e-8, -1.5974135493401878e-7, -4.4931218516427737e-7, -8.9425206437075919e-7, -1.4974897697121261e-6, -2.2398453592079887e-6, -3.0446755983549152e-6, -3.7132322364511465e-6, -3.8319697549395301e-6, -2.7195364492546108e-6, 3.4547459212726426e-7, 5.2440258992272639e-6, 9.7399020095683056e-6], [2.1339298015854655e-10, 1.8668131253020190e-9, 4.8606625724508183e-9, 8.4386638897941778e-9, 1.1134525858815068e-8, 1.0409257419711297e-8, 2.4507582738337381e-9, -1.6973546535078663e-8, -4.8499590251770172e-8, -7.9512628922708182e-8, -7.4230223918398705e-8, 6.0708235764700530e-9, 1.2455700907769396e-7], [-2.4734966534228801e-12, -2.0334399934817076e-11, -4.5598181849111005e-11, -5.6921218845443755e-11, -2.3641409437173362e-11, 8.4016327369010757e-11, 2.6300305499259871e-10, 4.1057671461678277e-10, 2.5593617923625665e-10, -5.0233801175309897e-10, -1.4887476344200721e-9, -1.0322053159293901e-9, 1.4039285477209592e-9], [2.7753421190198041e-14, 2.0664484276140215e-13, 3.4756301504862421e-13, 9.5655744796917952e-14, -8.1563920705627292e-13, -2.0912740543817027e-12, -2.2366278473627388e-12, 1.3047316672769046e-12, 8.6016201432010737e-12, 9.4144437265629153e-12, -1.1273097293547806e-11, -2.7318606929547560e-11, 1.2020725245411028e-11], [-3.0395808442774595e-16, -1.9464026825157885e-15, -1.6607873705184464e-15, 4.4838756860944716e-15, 1.4276973398033056e-14, 1.2548760494033527e-14, -2.2674772080037082e-14, -7.5622705888118083e-14, -2.9056656982189213e-14, 1.9220419342463271e-13, 1.3662181889605413e-13, -4.3263866993171419e-13, 1.9047469570631672e-14], [3.2549545916117971e-18, 1.6540092264986611e-17, -6.5885761407896796e-18, -8.5232400669911975e-17, -1.0063941538329184e-16, 1.6582245503014892e-16, 5.7549598094298407e-16, 3.4459391280185281e-17, -1.8952020265326908e-15, -3.9175278385518415e-16, 5.0419877873545781e-15, -3.9681188174959556e-15, -2.3627550530446761e-15], [-3.4298924118662772e-20, -1.2036311435816295e-19, 2.9891525114147060e-19, 8.7242210197580282e-19, -5.4589017152561965e-19, -4.1412712003120329e-18, -9.2037836537354989e-19, 1.5462997350863561e-17, 2.6933900424144617e-18, -5.1240401624401870e-17, 5.1580369622577941e-17, 1.2149683821278017e-17, -7.5238431713354120e-17], [3.5361635690790173e-22, 5.9526989543817666e-22, -4.7735541053971071e-21, -3.8238831148279843e-21, 2.3657217825097084e-20, 2.4095641311066164e-20, -1.0431267541041779e-19, -7.3053619596450891e-20, 4.6104425632374376e-19, -3.8102420336411238e-19, -4.6853808214114034e-19, 1.3453427943696645e-18, -1.6654716046703397e-18], [-3.6198761463266731e-24, 8.0568046214366282e-25, 5.2234844118780422e-23, -5.6044784953301184e-23, -2.9055655979830553e-22, 4.2633672979862815e-22, 1.1466530692028793e-21, -3.2161997070871310e-21, 2.0558464021908569e-22, 1.0241833031417962e-20, -2.2827378775860844e-20, 3.0156641399882538e-20, -3.1206421026441067e-20], [3.5665382318622765e-26, -8.6035297430487268e-26, -4.1545210253364670e-25, 1.5099188212078250e-24, 6.8743491744286072e-25, -1.0289793010286788e-23, 1.0867231078910686e-23, 3.1018736545322988e-23, -1.1976686318190965e-22, 2.0338234252010037e-22, -2.7119413679433419e-22, 3.7739511766289447e-22, -5.2292354997556383e-22], [-3.6288482065283977e-28, 1.4159419342632609e-27, 7.6243406489610791e-28, -2.0150465747739220e-26, 3.5963492502535739e-26, 5.3284173315228400e-26, -3.5721289665749882e-25, 6.2863739526104267e-25, -2.9974370354565792e-25, -1.0118011110343520e-24, 1.9012864086593953e-24, 7.9773581579357825e-25, -7.9790386570527333e-24]],
        [[2.2200669255601142e-3, 2.0319624894089602e-2, 5.8418190708073340e-2, 1.2079571458921657e-1, 2.1530154049550501e-1, 3.5588138310426779e-1, 5.6804332017367803e-1, 9.0161197505996978e-1, 1.4641483725683352e+0, 2.5241177987414972e+0, 4.9166677890069485e+0, 12.434053248987522e+0, 66.433201858539802e+0], [-8.3235600488235406e-5, -7.6742266483834577e-4, -2.2390679812983476e-3, -4.7346601664892474e-3, -8.6986045631137932e-3, -1.4943882199191055e-2, -2.5003319608025049e-2, -4.1954800170333597e-2, -7.2586190119668479e-2, -1.3405159607101147e-1, -2.7987970974171134e-1, -7.5242200672557651e-1, -4.1866103712713116e+0], [1.1688772599984287e-6, 1.0779870563715086e-5, 3.1459425033889059e-5, 6.6491960084867602e-5, 1.2187339190257338e-4, 2.0809234522455465e-4, 3.4369331478105338e-4, 5.6281135679837930e-4, 9.3297837912134263e-4, 1.6060546612110127e-3, 3.0148006685241436e-3, 7.0595995682168626e-3, 3.4609667103031045e-2], [-1.4575393355967398e-8, -1.3287388742121575e-7, -3.7840019500935306e-7, -7.6817859995289701e-7, -1.3240543786764574e-6, -2.0624530902517236e-6, -2.9664786187283463e-6, -3.9181266844169770e-6, -4.5561944235502568e-6, -4.0580545290033417e-6, -1.0934597880148091e-6, 5.1360152622414703e-6, 1.1973108217356643e-5], [1.6995081045641321e-10, 1.5055981592159637e-9, 4.0282620013114865e-9, 7.3318924806231630e-9, 1.0496388456925090e-8, 1.1618679805260032e-8, 7.1331306680007273e-9, -8.6176562072533339e-9, -4.1416956298957156e-8, -8.6878861392560754e-8, -1.0629999535837869e-7, -2.2181837544239028e-8, 1.5550706350766087e-7], [-1.8988250587493207e-12, -1.5972944981390789e-11, -3.7829787828946179e-11, -5.3399232257374222e-11, -3.8795833404853208e-11, 3.8511397455697258e-11, 2.0372942505885685e-10, 4.1709353951831190e-10, 4.4597437989014059e-10, -2.1501212227274312e-10, -1.6936313368148860e-9, -1.8467215605949302e-9, 1.6872441374905340e-9], [2.0532984446215813e-14, 1.5893697275252044e-13, 2.9948862140648124e-13, 1.8750894164324314e-13, -4.6276365322518123e-13, -1.6865348948976807e-12, -2.6238162743625353e-12, -7.1905798621172171e-13, 6.9785386023669193e-12, 1.4328271378020979e-11, -4.9479243446084229e-12, -4.1053805937679188e-11, 1.0978665082219198e-11], [-2.1710974617127236e-16, -1.4818473472316498e-15, -1.7321469617773041e-15, 2.2257419554444249e-15, 1.0900516024011333e-14, 1.5684184151200793e-14, -5.4890730012923238e-15, -6.6423818179583950e-14, -8.4676268945964720e-14, 1.4825333941451462e-13, 3.2188717461854425e-13, -5.3932094230820471e-13, -1.1595128292642216e-13], [2.2405432584488413e-18, 1.2634761662034208e-17, 1.2372074027576718e-18, -5.7004346625897831e-17, -1.0621097611681424e-16, 3.7368294350266120e-17, 4.8034694391997864e-16, 5.0912182821042418e-16, -1.4794995640953131e-15, -2.3782976896992515e-15, 6.2888655851727805e-15, -2.1942164530575398e-15, -6.6810744664801597e-15], [-2.2897036397340038e-20, -9.6837720379737073e-20, 1.4825790188875415e-19, 6.8800266423828717e-19, 1.5963211977304098e-19, -2.9357644045992085e-18, -3.9931648129112117e-18, 1.0241043276892911e-17, 1.9636757305806077e-17, -5.4934342710899380e-17, 9.5469263947341162e-18, 9.7722096218028917e-17, -1.7843461164502538e-16], [2.2608120574321971e-22, 5.6087925713621449e-22, -2.8945559554226468e-21, -5.0335538234452172e-21, 1.2083264472390973e-20, 3.3200254077104649e-20, -4.8506097790049716e-20, -1.7327739131668019e-19, 3.4648546729905057e-19, 2.4720393712330799e-19, -1.6900492965981960e-18, 3.0519891985256735e-18, -3.7681177647400895e-18], [-2.2957601922724809e-24, -1.9927048365599033e-24, 3.3692248135045264e-23, -5.8453099875877806e-24, -2.2809351675967635e-22, 1.8364930702813545e-23, 1.2650747807433136e-21, -1.2164792229540386e-21, -5.1659327875347711e-21, 1.7068699472498962e-20, -3.0296708166790462e-20, 4.6020114157918593e-20, -6.9085817106478946e-20], [2.0700835336299431e-26, -3.8142593971991873e-26, -3.5139755493222831e-25, 6.4239265017096642e-25, 1.6412221832575242e-24, -6.4712090212579711e-24, -4.7231473486074241e-24, 4.6465282640158641e-23, -8.9136676243843164e-23, 4.7797343698383979e-23, 3.2684561046326054e-23, 1.9086244919708464e-22, -1.1159140465065519e-21], [-2.2241211274110132e-28, 5.4014433124632994e-28, 1.4837487551075706e-27, -1.3121292478163637e-26, 4.2981649893041986e-27, 8.1812764480471134e-26, -2.1995718464745447e-25, -3.6788415620566854e-26, 1.3995821423803350e-24, -4.7828798963507591e-24, 1.0213882503099180e-23, -1.0061912732096123e-23, -1.4787728684451495e-23]],
        [[2.0624237092906213e-3, 1.8866243198450983e-2, 5.4178088007665045e-2, 1.1183049442373484e-1, 1.9883097869954281e-1, 3.2758224508126436e-1, 5.2067506089934412e-1, 8.2205473443460905e-1, 1.3262592133681356e+0, 2.2686920219412906e+0, 4.3809631006426884e+0, 10.985874856486535e+0, 58.337345032925266e+0], [-7.4540696629128798e-5, -6.8717512342631793e-4, -2.0045151484775940e-3, -4.2376822709983627e-3, -7.7843794231447387e-3, -1.3374935908719631e-2, -2.2393936550953651e-2, -3.7642098500222137e-2, -6.5351593189270783e-2, -1.2142177557815879e-1, -2.5584530342649540e-1, -6.9570789562965581e-1, -3.9091133772537176e+0], [1.0091160076256873e-6, 9.3200138898890193e-6, 2.7281588486041329e-5, 5.7943276688743281e-5, 1.0696509980484315e-4, 1.8447700628259166e-4, 3.0890365882708054e-4, 5.1523714648395000e-4, 8.7464942434229274e-4, 1.5489396855209428e-3, 2.9903450112973561e-3, 7.1176957840418402e-3, 3.4769428783383054e-2], [-1.2135147688605971e-8, -1.1114605924829260e-7, -3.1962658958229065e-7, -6.5914992576618904e-7, -1.1628259801966105e-6, -1.8724410477918839e-6, -2.8231960947582380e-6, -3.9908072249938972e-6, -5.1393029689714343e-6, -5.4625999778378791e-6, -3.0682203405796099e-6, 4.4268698557822853e-6, 1.4743870458659887e-5], [1.3644867223761826e-10, 1.2211463009936256e-9, 3.3396563591662671e-9, 6.3129847084536830e-9, 9.6321792001633232e-9, 1.2020028275811077e-8, 1.0573926764271740e-8, -5.8822894690590972e-10, -3.1039233037896689e-8, -8.7455913708706594e-8, -1.4051311196063985e-7, -7.0216184651172670e-8, 1.9146948810369039e-7], [-1.4715843411625361e-12, -1.2613742235788247e-11, -3.1215389338691014e-11, -4.8335803423252455e-11, -4.6615461709587961e-11, 3.3510249150471088e-12, 1.4050682437790051e-10, 3.7964968296529818e-10, 5.8039480866611270e-10, 1.6835704668182604e-10, -1.6816986061924781e-9, -3.0169663415913473e-9, 1.8804719102770721e-9], [1.5345134582789685e-14, 1.2261126961112312e-13, 2.5220121613798315e-13, 2.2773755556297084e-13, -2.0370954133669550e-13, -1.2447128524003436e-12, -2.5859910047748679e-12, -2.3053679267513469e-12, 4.0672370303799292e-12, 1.7138730591218470e-11, 6.8263791192515124e-12, -5.6417627152827658e-11, 3.5262520935573283e-12], [-1.5703734059930450e-16, -1.1291835379008492e-15, -1.6268912565041170e-15, 7.5898302273192971e-16, 7.6687668055206246e-15, 1.5441998133698426e-14, 7.3109374512297609e-15, -4.5637099996354767e-14, -1.1854269687249580e-13, 4.3884798669367739e-14, 5.1308981136976468e-13, -5.2566300347984712e-13, -4.6861857190607511e-13], [1.5570711532379313e-18, 9.5270649571940132e-18, 4.8046543831064960e-18, -3.5855782041077587e-17, -9.3969738907171311e-17, -4.4942443847205632e-17, 3.1422192077437891e-16, 7.4593722551342937e-16, -5.8718471508123569e-16, -3.9978024618141993e-15, 5.1145206065905763e-15, 4.0154026673283011e-15, -1.6714633136386366e-14], [-1.5618343963422576e-20, -7.6605349532982494e-20, 5.7461142954555881e-20, 4.8846448232080741e-19, 4.6564219952610278e-19, -1.6680732038892687e-18, -4.9202063435356545e-18, 2.8685090839268501e-18, 2.7990778828313211e-17, -3.0309536702694542e-17, -8.2055005338412476e-17, 2.6037268550750443e-16, -4.0853107469423970e-16], [1.4340602869940138e-22, 4.4174426469320115e-22, -1.7524415914088054e-21, -4.8153271340030814e-21, 3.7918563830874114e-21, 2.8647662523572835e-20, -9.5256423389831527e-22, -1.8087032567931354e-19, 5.5504645193841883e-20, 9.5276556844988406e-19, -2.7644695395709047e-18, 4.9986608691807067e-18, -8.2622866446204975e-18], [-1.5274243948168793e-24, -3.2198957684684989e-24, 1.9042811951222104e-23, 1.2127689712046243e-23, -1.4943725793225652e-22, -1.9296678321880483e-22, 8.4681977990815854e-22, 7.5566015056207725e-22, -7.2997061443922828e-21, 1.2771283343893535e-20, -1.2828545951013072e-20, 3.3792622531568321e-20, -1.4088643584809782e-19], [1.2590639129683247e-26, -1.1230252020330082e-26, -2.4514892235721608e-25, 1.9083435583175025e-25, 1.5864369203340753e-24, -2.4038861447602966e-24, -1.0952431662895836e-23, 3.2371894899597556e-23, 5.1697102376115357e-24, -2.2751606065994605e-22, 7.4213601927560877e-22, -9.0814571128095900e-22, -1.7940400130912404e-21], [-7.1239158164626741e-29, 7.7031563054737855e-28, 3.1895055078273402e-27, -3.1615009456919943e-27, -1.2388497044420833e-27, 7.5019770531197970e-26, -1.7662257584653360e-26, -4.1857523103102044e-25, 1.9706480180006881e-24, -4.8120668482886163e-24, 1.5390953939900578e-23, -3.3866175511261902e-23, -3.9257469113929798e-24]],
        [[1.9209789096874230e-3, 1.7562451956736864e-2, 5.0375775844060313e-2, 1.0379479329049835e-1, 1.8407555505377837e-1, 3.0223934155220943e-1, 4.7825329305519398e-1, 7.5074103790296865e-1, 1.2023525691134198e+0, 2.0380158786953482e+0, 3.8930500498569442e+0, 9.6515520327362220e+0, 50.797872624426394e+0], [-6.7015255455343733e-5, -6.1763605644512851e-4, -1.8007415166551591e-3, -3.8041296360307163e-3, -6.9819265620000940e-3, -1.1985732316976652e-2, -2.0055152501635201e-2, -3.3711364494093872e-2, -5.8608616067070908e-2, -1.0931584881798592e-1, -2.3211051037052252e-1, -6.3857802552104814e-1, -3.6301953005580096e+0], [8.7568302529237744e-7, 8.0956561147162987e-6, 2.3747098040664237e-5, 5.0608599000312956e-5, 9.3904435784580217e-5, 1.6315898367115704e-4, 2.7612244876472293e-4, 4.6753075213668419e-4, 8.1039511353172142e-4, 1.4751767205561219e-3, 2.9389700778138782e-3, 7.1618351883173525e-3, 3.4965977068910226e-2], [-1.0168812359885186e-8, -9.3476193620882185e-8, -2.7087283514896609e-7, -5.6557384106061765e-7, -1.0163681244648605e-6, -1.6810640893354458e-6, -2.6348163501752755e-6, -3.9428663284324582e-6, -5.5389186245059121e-6, -6.8124610035161925e-6, -5.5714255421378761e-6, 2.7425095327137508e-6, 1.8107108383260887e-5], [1.1037068517371077e-10, 9.9590482290854081e-10, 2.7722833343977111e-9, 5.4020411548279722e-9, 8.6666849187986741e-9, 1.1822292183167068e-8, 1.2785188639336025e-8, 6.3621411742488899e-9, -1.8731070573972968e-8, -7.9953902248465161e-8, -1.7126389655315175e-7, -1.4517094815671909e-7, 2.2848301676073514e-7], [-1.1509182985646743e-12, -1.0018460773748628e-11, -2.5690357114358940e-11, -4.2729790399195135e-11, -4.9251337532688895e-11, -2.1544104257789700e-11, 8.1873447463129953e-11, 3.1173166186251865e-10, 6.3698603335811795e-10, 5.7925376085237560e-10, -1.3304798245598482e-9, -4.5229979949298520e-9, 1.7310082294870052e-9], [1.1568313235369743e-14, 9.4870361361548718e-14, 2.0902387048305112e-13, 2.3531102913773903e-13, -2.8421621600102981e-14, -8.4002566974955585e-13, -2.2668169996112388e-12, -3.2429601074231782e-12, 6.3596926501675883e-13, 1.6470175462534642e-11, 2.2885135753553979e-11, -6.7641172408221373e-11, -1.9826521320557208e-11], [-1.1522119446738101e-16, -8.6531082499518253e-16, -1.4521120600502073e-15, -1.4302130859265528e-16, 4.9477081414641832e-15, 1.3246126616999953e-14, 1.4588364549025308e-14, -2.1421948961033102e-14, -1.2139077004228564e-13, -9.3273000096473486e-14, 6.0778473544124446e-13, -2.0675107583398659e-13, -1.3161931918205254e-12], [1.0834497050849752e-18, 7.0531767697688773e-18, 5.7874472413672687e-18, -2.1585424392515346e-17, -7.5854662474667721e-17, -8.6617990513534993e-17, 1.4400340374393153e-16, 7.3058179694996648e-16, 3.8630280978727288e-16, -4.3023971372359023e-15, 1.4953453479825240e-16, 1.7177275507968064e-14, -3.9086887997594412e-14], [-1.1051530731282428e-20, -6.1720453037903915e-20, 1.4493542143670575e-21, 3.0926298705742054e-19, 5.0868214107164933e-19, -7.1168509988196249e-19, -4.3633734675863082e-18, -3.3213276007097390e-18, 2.4210007037323776e-17, 1.5093250594465849e-17, -1.9076641676667129e-16, 4.7001338050296914e-16, -8.8673679969805291e-16], [8.9457190309896645e-23, 3.1067921163468603e-22, -1.0891498883570202e-21, -4.0589151298039577e-21, -1.0408296813397685e-21, 1.9046257261557222e-20, 2.5367422103250675e-20, -1.2100848229840937e-19, -2.2610999856706407e-19, 1.2065367714064822e-18, -2.2881102842394879e-18, 4.7929493493453566e-18, -1.6119552123996415e-17], [-8.9210067087039090e-25, -1.9896932191862033e-24, 1.3732653256128264e-23, 2.4783325824550214e-23, -6.5936801726489593e-23, -2.0912158982089794e-22, 3.8460080396934517e-22, 1.8086016695666960e-21, -4.7990892073812934e-21, -2.2038155340820673e-21, 3.9263520998752943e-20, -6.1674553965475116e-20, -2.0103877302094118e-19], [1.6925256360124572e-26, 8.5181214632566734e-26, 9.1484227352084497e-26, 5.2078483942409357e-25, 2.1574135419777234e-24, 1.9580296243496028e-24, -6.5555628194085742e-24, 1.3105309254668539e-23, 9.2675688378839314e-23, -3.4538214951661821e-22, 1.3237862643454763e-21, -3.2076284556728660e-21, 2.7026522467944386e-22], [2.8039735118787414e-28, 3.3906086914511824e-27, 1.0993523314754384e-26, 1.8123543998981346e-26, 2.9139338547506345e-26, 1.0122787099652558e-25, 1.8442373403267921e-25, -2.3854950923936340e-25, 1.2527030034930845e-24, 1.0012934837768081e-24, 3.2112246516587152e-24, -4.8653435386946866e-23, 1.1252871637615325e-22]],
        [[1.7935875446305106e-3, 1.6388574654986988e-2, 4.6954484038418369e-2, 9.6570906629485220e-2, 1.7082593006040490e-1, 2.7951151253029016e-1, 4.4025436975775655e-1, 6.8691024208737449e-1, 1.0914050608504821e+0, 1.8309120351084501e+0, 3.4520949992356377e+0, 8.4317621099331591e+0, 43.817943362478233e+0], [-6.0469529984173005e-5, -5.5710124215134136e-4, -1.6230499129522910e-3, -3.4250020009690519e-3, -6.2771942956729883e-3, -1.0757975121883694e-2, -1.7969060560528700e-2, -3.0158200025883593e-2, -5.2395450098863435e-2, -9.7862166155136735e-2, -2.0891456193380157e-1, -5.8119864256907636e-1, -3.3495338062538995e+0], [7.6353928396126589e-7, 7.0633157429532590e-6, 2.0746653629994253e-5, 4.4313094316088572e-5, 8.2507511393402400e-5, 1.4410371770095195e-4, 2.4577689023033537e-4, 4.2101871987921759e-4, 7.4254992839668000e-4, 1.3862004118919601e-3, 2.8549058321167335e-3, 7.1775357693515254e-3, 3.5206214180404720e-2], [-8.5729741439270465e-9, -7.9028763607917921e-8, -2.3036764149330430e-7, -4.8567374805649875e-7, -8.8557606117344063e-7, -1.4963296512815853e-6, -2.4199630443164366e-6, -3.7955819429668922e-6, -5.7369895632159917e-6, -7.9787239573643789e-6, -8.4889732693231205e-6, -3.9274838100742519e-7, 2.1998446478238249e-5], [8.9886164893941253e-11, 8.1646537040268760e-10, 2.3054558985184232e-9, 4.6032320074907678e-9, 7.6847112219545819e-9, 1.1218144806932475e-8, 1.3913811040675934e-8, 1.1782954611485900e-8, -6.1036506220931198e-9, -6.4704618267369533e-8, -1.9102870816626515e-7, -2.5194211184241827e-7, 2.5448653606285389e-7], [-9.0841987494041512e-13, -8.0087820546658777e-12, -2.1140986813935590e-11, -3.7199203416797704e-11, -4.8528786447021555e-11, -3.7586052273945492e-11, 3.2754844527705515e-11, 2.2920478632807497e-10, 6.1359312444940989e-10, 9.2846597057538515e-10, -5.8335302409243200e-10, -6.1369706412478306e-9, 6.3723855242661556e-10], [8.7722549608341228e-15, 7.3484040015936482e-14, 1.7091303973171120e-13, 2.2310171953996588e-13, 7.8804269623344116e-14, -5.1083490300272455e-13, -1.8158763745303106e-12, -3.5391593252927457e-12, -2.4733002094825739e-12, 1.2076680198081572e-11, 3.8836799715183657e-11, -6.2972837067868688e-11, -7.9971440552801243e-11], [-8.6285676060288933e-17, -6.7283073897507999e-16, -1.2731316594977881e-15, -6.8421239814478738e-16, 2.8017481041270920e-15, 1.0195940144778236e-14, 1.6908159910545609e-14, -7.2520277599662194e-16, -9.7156096322656105e-14, -2.1340750131119438e-13, 4.8951753149459960e-13, 6.4228622694315786e-13, -3.2181134059949688e-12], [7.4321471475798047e-19, 5.0503339700087206e-18, 5.2304751788340643e-18, -1.3013469395325337e-17, -5.8662525329309918e-17, -1.0034115740804856e-16, 8.7133780898787384e-18, 5.4452389751302510e-16, 1.0575458929673878e-15, -2.9550902223401345e-15, -7.7806401040010421e-15, 3.6421113650553053e-14, -8.4499509735005492e-14], [-7.9493903691607877e-21, -4.9064491169233438e-20, -2.6276026663647501e-20, 1.8045543070291985e-19, 4.4665133353514956e-19, -8.5557320364743265e-20, -3.0622857135711950e-18, -6.4135300082180945e-18, 1.2441987697804630e-17, 5.6989259154049640e-17, -2.2944754507278282e-16, 5.5407765040951576e-16, -1.6739582038117942e-15], [7.5391297064222522e-23, 3.9332539246186394e-22, -1.3474724268712158e-22, -1.9617569919013833e-21, -9.1697518481771770e-22, 1.3997279664741087e-20, 3.9511939288642143e-20, -3.0057632061793205e-20, -3.2159919348283366e-19, 7.9564956069675730e-19, 7.7067998388478398e-19, -2.0689363842333498e-18, -2.1375348977198180e-17], [4.6169967179130837e-25, 7.9221903679073108e-24, 3.6407477732184833e-23, 8.3308209225442757e-23, 9.2633841336316809e-23, 3.0801009808537838e-23, 3.6494066373279927e-22, 2.3105043898090716e-21, 7.3834022885896424e-22, -1.4682634898262405e-20, 9.5211736422806678e-20, -2.6231149061747204e-19, 6.8892087264192019e-20], [4.2852504734691156e-26, 3.5568398561556734e-25, 9.3176303002819434e-25, 2.1033819229547981e-24, 4.7655468191524130e-24, 8.3213326162706924e-24, 6.6356912531619834e-24, 1.0982418294402757e-23, 1.2752226112466521e-22, -1.2497568288931375e-22, 7.4351835782015630e-22, -4.6282217522946922e-21, 1.3868543846595712e-20], [6.4788283329186614e-28, 6.4045363006593317e-27, 1.9454042436447856e-26, 3.8287702118146903e-26, 6.3112760374999534e-26, 1.2940936336347107e-25, 2.8131399699463955e-25, 1.1054375481511057e-25, 2.4279786329722364e-26, 6.5745006650769699e-24, -2.6840902144612901e-23, 1.2983817462821941e-23, 4.4414163597382847e-22]],
        [[1.6784474182561789e-3, 1.5328024713639803e-2, 4.3866025811548606e-2, 9.0057799495452782e-2, 1.5889937700098530e-1, 2.5909364527615412e-1, 4.0619320023153033e-1, 6.2982023284540712e-1, 9.9233598157441419e-1, 1.6459626794993236e+0, 3.0567454989321886e+0, 7.3267153530511569e+0, 37.401410370027072e+0], [-5.4749579807146217e-5, -5.0417759960723468e-4, -1.4675379918536272e-3, -3.0926121954341488e-3, -5.6576245925541990e-3, -9.6739788713609407e-3, -1.6115183907687770e-2, -2.6968714728974887e-2, -4.6731178952685255e-2, -8.7171638461226114e-2, -1.8653528272162487e-1, -5.2387555752217142e-1, -3.0667588330336801e+0], [6.6872802792699328e-7, 6.1883591017573737e-6, 1.8190302262340696e-5, 3.8903290843927811e-5, 7.2586698913010843e-5, 1.2719798872814568e-4, 2.1808744605593382e-4, 3.7673928631812410e-4, 6.7351227567193352e-4, 1.2849019233896407e-3, 2.7344897394140112e-3, 7.1443428537351827e-3, 3.5494610412951765e-2], [-7.2694799237110059e-9, -6.7156996077197781e-8, -1.9665182517843040e-7, -4.1769027094098537e-7, -7.7025948050814777e-7, -1.3234286909501886e-6, -2.1943088532388811e-6, -3.5749712199023531e-6, -5.7405499286466076e-6, -8.8518930123681212e-6, -1.1584065857632042e-5, -5.4791445373708535e-6, 2.6031004703989770e-5], [7.3640260853009178e-11, 6.7248784145934363e-10, 1.9208620297024273e-9, 3.9110215413286752e-9, 6.7383695934026180e-9, 1.0365075220134519e-8, 1.4171218486634705e-8, 1.5525264274948246e-8, 5.3754770199639387e-9, -4.3767388908992724e-8, -1.9244105016155328e-7, -3.8758353396247768e-7, 2.3890382521834703e-7], [-7.2443217632553939e-13, -6.4544746179762030e-12, -1.7448749740526380e-11, -3.2116038584730252e-11, -4.5893337575640945e-11, -4.6781861513254675e-11, -5.2035870339894022e-12, 1.4577376413566815e-10, 5.2574220899924022e-10, 1.1379985576587814e-9, 4.7786479891667689e-10, -7.2835800119466212e-9, -2.7300772017975403e-9], [6.6507723204870414e-15, 5.6669068655198620e-14, 1.3748161243839874e-13, 1.9903385044304093e-13, 1.3340713458677933e-13, -2.6994022491948310e-13, -1.3527246194462371e-12, -3.3506818192625064e-12, -4.6693632680511419e-12, 5.1219867659984885e-12, 4.7907762267060556e-11, -2.5936342801174559e-11, -2.1806219393214134e-10], [-6.6418952427283468e-17, -5.3541583618536097e-16, -1.1178703048973977e-15, -1.0026224646077875e-15, 1.1871875939605558e-15, 7.0543779660900157e-15, 1.5767125456662248e-14, 1.2982257615361336e-14, -5.8461049210252961e-14, -2.7032109375082009e-13, 1.2291198463262683e-13, 2.0847036977488177e-12, -7.0298485432226569e-12], [5.2256141907871979e-19, 3.7051747481393184e-18, 4.7182660226915694e-18, -6.7269250381755741e-18, -4.1569382839717654e-17, -9.1789879164201866e-17, -6.8010902050960526e-17, 3.1804613614895006e-16, 1.2977920520232220e-15, -4.9334410045668765e-16, -1.4423815444373455e-14, 5.1551671049088981e-14, -1.5694142020624660e-13], [-3.8114224923595411e-21, -2.0247509456628153e-20, 1.6823369482954517e-20, 2.1143867043694897e-19, 5.6913439907142817e-19, 6.3942178247341477e-19, -1.0214164941808976e-18, -5.4101297106754298e-18, 1.9715220210060006e-18, 7.5349046748434345e-17, -1.1035135645670976e-16, 1.8284200290371524e-16, -2.1757347041745092e-15], [1.5139639685879794e-22, 1.2201613318652703e-21, 2.7612085780789706e-21, 4.5283760539565353e-21, 9.1483962781660216e-21, 2.6022462937841340e-20, 6.6821221195138024e-20, 8.4650785158528858e-20, -1.6184408381271137e-19, 1.3681203617705161e-19, 5.1275087437681129e-18, -1.7590650390090712e-17, 6.1711218828925370e-18], [3.1537372478337452e-24, 3.1255456826991162e-23, 1.0002623636875938e-22, 2.2060783176909605e-22, 3.7735136563398027e-22, 5.3930482479482725e-22, 9.3677873410672319e-22, 2.8961891458749451e-21, 6.1560659071835086e-21, -1.2851431424340483e-20, 8.6674316430898524e-20, -4.0617458963253902e-19, 1.4361387148425392e-18], [6.0970404328244631e-26, 5.3695283949943767e-25, 1.4788506895734496e-24, 3.1023025694759089e-24, 6.1078760290033527e-24, 1.0890241249960663e-23, 1.3528931843159993e-23, 8.7877932819704387e-24, 8.0085428663077874e-23, 1.6829601826640438e-22, -1.2587547260362715e-21, 7.6094157612564257e-23, 4.5149238375742306e-20], [-3.5432796893649712e-28, -3.1456145548730122e-27, -9.3230680875432543e-27, -2.3360988763969949e-26, -5.5101934229687675e-26, -1.0538561874470044e-25, -1.5134972633155301e-25, -4.4094665013659815e-25, -2.0946781388514571e-24, 2.7637367668960244e-24, -4.4716564184457290e-23, 1.7669559822125277e-22, 6.5723167915625092e-22]],
        [[1.5740352893316306e-3, 1.4366747359200766e-2, 4.1069351500609564e-2, 8.4168648969213769e-2, 1.4813680006883982e-1, 2.4071492312114699e-1, 3.7562685713308301e-1, 5.7876397822833011e-1, 9.0404511346728843e-1, 1.4815550024951978e+0, 2.7050744438820004e+0, 6.3358289889973046e+0, 31.552880506827276e+0], [-4.9729708266054779e-5, -4.5772070095820700e-4, -1.3309577957821958e-3, -2.8004183827960791e-3, -5.1121392013674676e-3, -8.7171733232485383e-3, -1.4471975236164929e-2, -2.4121982305497757e-2, -4.1616407863139681e-2, -7.7327458311870349e-2, -1.6526660982295933e-1, -4.6710041486728855e-1, -2.7814938536205380e+0], [5.8811205305373223e-7, 5.4430000404742028e-6, 1.6003919357624942e-5, 3.4246082889342761e-5, 6.3960767500105268e-5, 1.1228004528109451e-4, 1.9310742744698242e-4, 3.3541249748379596e-4, 6.0546767250233956e-4, 1.1752432137946784e-3, 2.5775252277005835e-3, 7.0365307438480792e-3, 3.5826984918209537e-2], [-6.1990717580817523e-9, -5.7360870941374156e-8, -1.6854087533224996e-7, -3.6000282853966053e-7, -6.6960566624203391e-7, -1.1653630480850815e-6, -1.9700204427550600e-6, -3.3074702223214272e-6, -5.5769840005799289e-6, -9.3659856758562388e-6, -1.4523992613707900e-5, -1.2856451254947756e-5, 2.9054285493882260e-5], [6.0606568533773337e-11, 5.5585245043323340e-10, 1.6024413659660148e-9, 3.3141052743349579e-9, 5.8545286218276830e-9, 9.3790568603212726e-9, 1.3776911649109921e-8, 1.7671304848532517e-8, 1.4661498286520857e-8, -2.0389755402948857e-8, -1.7138657682168369e-7, -5.3378295166552112e-7, 1.1280191443398196e-7], [-5.8531822677537016e-13, -5.2611812220961158e-12, -1.4506178291599753e-11, -2.7691634927582258e-11, -4.2420640143714834e-11, -5.1192315692438533e-11, -3.2630506722568902e-11, 7.0719135442004626e-11, 3.9876240153049546e-10, 1.1708339978674521e-9, 1.6146977408482241e-9, -7.0187969417442740e-9, -1.0959937733028379e-8], [5.0146563064404225e-15, 4.3312517192046809e-14, 1.0859341905655843e-13, 1.6946168863079864e-13, 1.5181933425118344e-13, -1.0833844826773099e-13, -9.4305011989783598e-13, -2.8678553125860921e-12, -5.7197801536405411e-12, -2.2583648844039128e-12, 4.4608974840699472e-11, 5.5356128491424201e-11, -4.9572014600121142e-10], [-5.0406513513737125e-17, -4.1600297429739047e-16, -9.2617910791284882e-16, -1.0398930019989555e-15, 2.9228421756786171e-16, 4.7404887789504318e-15, 1.3608080269057060e-14, 2.0948567263027095e-14, -1.6467431563335391e-14, -2.4260554455248570e-13, -3.5656274403183976e-13, 3.6704911444359578e-12, -1.3091329453633434e-11], [5.3448027537916951e-19, 4.2446918729834214e-18, 8.5315533120011191e-18, 6.8120672149061761e-18, -9.8559633273172610e-18, -4.3192328491235641e-17, -4.5440899723308542e-17, 2.1509685471693766e-16, 1.3242269805668253e-15, 2.2043888899778769e-15, -1.4006371886437763e-14, 4.1446751239777481e-14, -2.0900953855071243e-13], [5.7035079932476400e-21, 6.2025537542066024e-20, 2.3138547823253699e-19, 6.1964581247850498e-19, 1.3309769330593173e-18, 2.2672252040191368e-18, 2.5998368639910359e-18, 5.0557639404335731e-19, 1.5386480690506006e-18, 7.1997953435006646e-17, 1.4533097253862882e-16, -8.3902873788342024e-16, 7.3838472584707853e-17], [3.3381493730562555e-22, 2.9723997351451662e-21, 8.1625804768239782e-21, 1.6249835613562733e-20, 2.9639249764953051e-20, 5.6537029157907901e-20, 1.1462894287216594e-19, 2.0552075053845491e-19, 1.4028657533233722e-19, -2.5058307894165644e-19, 6.8450190256139257e-18, -3.1511581481506578e-17, 1.2623788267437118e-16], [4.2895703532635162e-24, 4.0573169464630088e-23, 1.2244374120737136e-22, 2.6167799646526549e-22, 4.5544034252615326e-22, 6.6932829744035115e-22, 9.3722115975836267e-22, 2.0416902725108935e-21, 6.0269519871047056e-21, -5.9568222661538875e-21, -2.3688999182103865e-20, -1.3027154918373941e-19, 4.1193185962678802e-18], [-4.8199094921062954e-26, -4.6882519878573595e-25, -1.4839560001368136e-24, -3.3820308997038467e-24, -6.5251845748094182e-24, -1.1907391063321243e-23, -2.4624430643660222e-23, -6.2000315488121765e-23, -1.1508624580397982e-22, 1.6291813259445928e-23, -3.1143188882561337e-21, 1.1923881765093669e-20, 5.5248660987694696e-20], [-4.3239491192933756e-27, -3.9909681138392107e-26, -1.1713975892690855e-25, -2.5176518329011598e-25, -4.7583244594818695e-25, -8.4204607649263497e-25, -1.4213487305604382e-24, -2.4451532618230482e-24, -5.4606371809027835e-24, -8.8342905468348056e-24, -1.8820418989488157e-23, 2.2831576006322714e-22, -6.9560072680783358e-22]],
        [[1.4790562798658707e-3, 1.3492771916344131e-2, 3.8529356398545639e-2, 7.8828710196420519e-2, 1.3839984517308567e-1, 2.2413628207924234e-1, 3.4815551313043293e-1, 5.3308107881586936e-1, 8.2544729751164942e-1, 1.3359433638350390e+0, 2.3945784517578690e+0, 5.4573227476839808e+0, 26.277620363445428e+0], [-4.5306731728697489e-5, -4.1678647904704515e-4, -1.2106017093782294e-3, -2.5428691207083495e-3, -4.6310648812744353e-3, -7.8723977975091873e-3, -1.3017986429760207e-2, -2.1592550055284576e-2, -3.7035816551478169e-2, -6.8378876172442496e-2, -1.4538736481115730e-1, -4.1158048420747165e-1, -2.4934742179057259e+0], [5.1917507419526039e-7, 4.8047319156507713e-6, 1.4126125353293997e-5, 3.0226617069835395e-5, 5.6460185386918684e-5, 9.9161952593236882e-5, 1.7076459599870599e-4, 2.9745444113480872e-4, 5.4019017256097945e-4, 1.0616512802086425e-3, 2.3880270365565007e-3, 6.8267125973471880e-3, 3.6176765482796359e-2], [-5.3169201662253550e-9, -4.9256190327493597e-8, -1.4508933586139960e-7, -3.1119597241896455e-7, -5.8251974295512621e-7, -1.0235867341126816e-6, -1.7559124516452251e-6, -3.0169397440395196e-6, -5.2861261362736399e-6, -9.5099695395196642e-6, -1.6953882048674341e-5, -2.2410605814106725e-5, 2.8321328414015981e-5], [5.0000554354272598e-11, 4.6017164720251197e-10, 1.3364806846901346e-9, 2.7988175677044784e-9, 5.0432515129827960e-9, 8.3395342094858845e-9, 1.2928470468783468e-8, 1.8449221723558398e-8, 2.1251790750129846e-8, 1.9857512150971048e-9, -1.2942981656492906e-7, -6.5192458948520165e-7, -2.5879897954121799e-7], [-4.7968068229003653e-13, -4.3431512630466819e-12, -1.2170109542593459e-11, -2.3923755736127155e-11, -3.8661144086758514e-11, -5.2263659818315163e-11, -5.0736151940877835e-11, 9.7837449474306443e-12, 2.6084333734817379e-10, 1.0454010894085086e-9, 2.5214840992204999e-9, -4.3437692083365334e-9, -2.7964865475703371e-8], [3.8937362378129137e-15, 3.4082108162252647e-14, 8.8234518240996472e-14, 1.4775133561596770e-13, 1.6460456828117322e-13, 2.0680048132877970e-14, -5.6168950860811667e-13, -2.1702128724311296e-12, -5.5692295984738986e-12, -7.6911224152860748e-12, 2.9488503714191355e-11, 1.7041400604530611e-10, -9.4631939409825004e-10], [-2.7151067787912472e-17, -2.1876001192220559e-16, -4.4863681384081800e-16, -3.2211413627799677e-16, 1.0018402197697541e-15, 5.1408983431328298e-15, 1.4583888491198332e-14, 2.9811859588998583e-14, 2.8254116217532582e-14, -1.3310483215619834e-13, -6.7296886625690401e-13, 4.2706101615287148e-12, -1.8370214937122831e-11], [1.0123422799189294e-18, 8.9221942446397466e-18, 2.3654229571464652e-17, 4.2748946636746303e-17, 6.2621029058027761e-17, 8.3351944727389669e-17, 1.3519387894779180e-16, 3.9112569814043163e-16, 1.5216853161965773e-15, 4.5407284610410735e-15, -4.5113596892722172e-15, -1.1031986786638509e-14, -6.6382563333378642e-14], [2.1156211655816571e-20, 2.0083622057479999e-19, 6.1783997031498780e-19, 1.3948109233901611e-18, 2.7178607655320266e-18, 4.7615810445858178e-18, 7.3469363037447263e-18, 9.1171706446188558e-18, 9.7235058676499289e-18, 5.5007844932079994e-17, 3.5277752301361100e-16, -2.0117027897136861e-15, 9.2747192000164623e-15], [3.6889675703853236e-22, 3.3149267143377626e-21, 9.2107830453985168e-21, 1.8278371416697761e-20, 3.1744378794269944e-20, 5.4120106849805166e-20, 9.7602373632435792e-20, 1.7587520143518375e-19, 1.7310182399781268e-19, -6.9435104150833955e-19, 2.4144271730160500e-18, -2.1558729266357515e-17, 3.3726207350347217e-16], [-5.4884390057854876e-24, -5.0734896133157741e-23, -1.4984362046953057e-22, -3.2856602988632007e-22, -6.5393861570770187e-22, -1.2871677278923493e-21, -2.5511073274251637e-21, -4.7612254981654858e-21, -7.1585807865537588e-21, -1.9175784866154833e-20, -1.7412946131301139e-19, 6.1808422903063409e-19, 4.4232597235688688e-18], [-3.9618418372787466e-25, -3.6735239070417981e-24, -1.0827042475573390e-23, -2.3178426798020799e-23, -4.3103916008214266e-23, -7.4997213279002005e-23, -1.2875576979000129e-22, -2.3171059276674253e-22, -4.3901915821944497e-22, -5.9072512782490855e-22, -2.6574228013116194e-21, 1.5993220661733169e-20, -7.8456035118223336e-20], [-8.4305749830244193e-27, -7.7425197603042201e-26, -2.2426205495445305e-25, -4.6953429317531743e-25, -8.5163084918548529e-25, -1.4335810894928328e-24, -2.2978962585621968e-24, -3.5419560512000198e-24, -5.8618365108577458e-24, -1.1284483052120406e-23, 3.7913647717329425e-23, -1.4469638871071889e-22, -4.7789015202459911e-21]],
        [[1.3924033136757171e-3, 1.2695849256610143e-2, 3.6215893459877091e-2, 7.3973473633099649e-2, 1.2956819162873990e-1, 2.0914743490736174e-1, 3.2342136124546729e-1, 4.9216451192676584e-1, 7.5550062604971028e-1, 1.2073188275276745e+0, 2.1222415044744683e+0, 4.6877953838745701e+0, 21.581078972191261e+0], [-4.1395640260998737e-5, -3.8059407467636770e-4, -1.1042112369438403e-3, -2.3152674265408929e-3, -4.2060298836967275e-3, -7.1260449798363239e-3, -1.1732718056519254e-2, -1.9352711433317336e-2, -3.2961897686242281e-2, -6.0340085510568440e-2, -1.2712808975030729e-1, -3.5822477897161822e-1, -2.2028224564895211e+0], [4.5987141702547571e-7, 4.2551075022018279e-6, 1.2505688551225413e-5, 2.6745786007551006e-5, 4.9929318088684156e-5, 8.7645251849851580e-5, 1.5089932909203212e-4, 2.6302042574286719e-4, 4.7894644593894521e-4, 9.4837705067007717e-4, 2.1739260519128017e-3, 6.4931609018241640e-3, 3.6468845003621320e-2], [-4.5887655197798178e-9, -4.2545314005647813e-8, -1.2554025242876523e-7, -2.7004967448789386e-7, -5.0778401826348373e-7, -8.9843289696048132e-7, -1.5577561813353976e-6, -2.7227032469184575e-6, -4.9112524102158182e-6, -9.3219131653802398e-6, -1.8589415166262579e-5, -3.3275147381684069e-5, 1.8297890952812978e-5], [4.1302076400418045e-11, 3.8119006143842435e-10, 1.1137742038171317e-9, 2.3560829234519339e-9, 4.3133850179753773e-9, 7.3131553306073232e-9, 1.1815655861723623e-8, 1.8200387711853628e-8, 2.5226035850279658e-8, 2.0837784276132501e-8, -7.3482575051124749e-8, -6.8872175934960934e-7, -1.0864436995655145e-6], [-3.9090638941975107e-13, -3.5589997695729009e-12, -1.0095108171659723e-11, -2.0281045025387593e-11, -3.4050568457448098e-11, -4.9569336781715102e-11, -5.8564014447221378e-11, -3.0532581097189373e-11, 1.4252615999041473e-10, 8.3409716760815387e-10, 2.9987711095827859e-9, 1.0698760836774000e-9, -5.6679742337190268e-8], [3.7171811428916893e-15, 3.3180283035867554e-14, 8.9993554684509583e-14, 1.6616321174396435e-13, 2.3663428238982899e-13, 2.2971670789790042e-13, -4.9518417659468362e-14, -1.1046778230197392e-12, -4.0398091847663841e-12, -9.1366550339993719e-12, 1.0570037692105956e-11, 2.7334226878707132e-10, -1.4199622661656163e-9], [1.9406905812321704e-17, 1.9996830181657401e-16, 7.1154982058870862e-16, 1.9389961528124229e-15, 4.7172447179377847e-15, 1.0783972444990146e-14, 2.3550489443851625e-14, 4.8306779104997720e-14, 8.2859491244293499e-14, 3.6301177598057744e-14, -6.1237767199807403e-13, 2.6574072320099745e-12, -1.2275135489168168e-11], [1.9190544203786458e-18, 1.7424415137117425e-17, 4.9246207354350129e-17, 9.9032099760119766e-17, 1.6971863758801389e-16, 2.6857583546110550e-16, 4.2341680163654321e-16, 7.6133314723864151e-16, 1.8573014196153785e-15, 5.7293506421224474e-15, 7.8030067103066304e-15, -9.0690263829843190e-14, 5.3968139549656590e-13], [2.3957631379910476e-20, 2.2289091375815715e-19, 6.6109623486368391e-19, 1.4255297847327698e-18, 2.6529755248269730e-18, 4.4855263337015395e-18, 6.7984834182022242e-18, 8.1167976330188592e-18, 3.2821630619717629e-18, 4.2739750398427580e-19, 2.6761380472236690e-16, -2.1516170523123413e-15, 2.4515235122019635e-14], [-4.3922995220359771e-22, -4.1543819815162604e-21, -1.2724090828190571e-20, -2.8754239171499292e-20, -5.7011111317482990e-20, -1.0552148720536561e-19, -1.8751468234863832e-19, -3.3177448501683296e-19, -6.8371955874768711e-19, -2.3028455521483106e-18, -7.1143097696346000e-18, 1.7372264895264399e-17, 3.4399651578818295e-16], [-3.4124849041800178e-23, -3.1503705767038589e-22, -9.2206558472668175e-22, -1.9619966863858794e-21, -3.6465952069323224e-21, -6.3914751475557497e-21, -1.1023846048338583e-20, -1.9095479895698721e-20, -3.2618078410552692e-20, -5.5071159295338276e-20, -2.3293779791415003e-19, 9.8581421882576178e-19, -6.7290556332236773e-18], [-7.4247307719874193e-25, -6.8287215230612323e-24, -1.9813238416726666e-23, -4.1475075165905808e-23, -7.4909300478530290e-23, -1.2522397877503711e-22, -2.0132219823240235e-22, -3.2212616625313106e-22, -5.3052460840915704e-22, -7.0873304936456284e-22, 5.9653334027609533e-22, -4.3968673487085411e-21, -3.9846065836611636e-19], [-1.8054935110855054e-27, -1.5482694772435690e-26, -3.8267445297044977e-26, -5.8257828628231848e-26, -4.8195287962855169e-26, 5.7410310279986903e-26, 4.3401436589034596e-25, 1.5945180114471593e-24, 4.8469590676818619e-24, 1.1509196617248683e-23, 8.3138773848609277e-23, -5.5374573754396323e-22, -5.8959968566575636e-21]],
        [[1.3131241904239390e-3, 1.1967155053430922e-2, 3.4102950203087623e-2, 6.9547076185881500e-2, 1.2153706609180822e-1, 1.9556372255164871e-1, 3.0110613544062184e-1, 4.5546324924538100e-1, 6.9322674198490272e-1, 1.0938762300127160e+0, 1.8846592719014806e+0, 4.0218970141021028e+0, 17.467606925606999e+0], [-3.7926256736382469e-5, -3.4849682027643411e-4, -1.0099032487388448e-3, -2.1136519681742409e-3, -3.8298452121741552e-3, -6.4660913789836137e-3, -1.0597170066008560e-2, -1.7374340553504695e-2, -2.9359017933638413e-2, -5.3193659429558846e-2, -1.1064433939718078e-1, -3.0805999054244328e-1, -1.9105874923546887e+0], [4.0852975727290394e-7, 3.7789572972418113e-6, 1.1099871940102317e-5, 2.3718757302112961e-5, 4.4228672307900703e-5, 7.7534700498948349e-5, 1.3330238027556826e-4, 2.3207178718867427e-4, 4.2251256395722601e-4, 8.3902825833207446e-4, 1.9458080749806773e-3, 6.0296556067206767e-3, 3.6540504145177166e-2], [-3.9853121529719870e-9, -3.6969330966474591e-8, -1.0920752362800425e-7, -2.3535524424266181e-7, -4.4385252198468208e-7, -7.8893231480136313e-7, -1.3778865736871424e-6, -2.4373111419160939e-6, -4.4891909671253517e-6, -8.8662560041126253e-6, -1.9276780955466093e-5, -4.3748532131571154e-5, -1.0076130077101804e-5], [3.4458622611586120e-11, 3.1877730449280042e-10, 9.3607790550353332e-10, 1.9967465348779051e-9, 3.7033250854182267e-9, 6.4068554639752464e-9, 1.0694503150482438e-8, 1.7449068331338849e-8, 2.7329169515090058e-8, 3.5513671544217897e-8, -1.2184316266858038e-8, -5.9766975545426595e-7, -2.5748434696534630e-6], [-2.8764255062749953e-13, -2.6269863643748775e-12, -7.5018997932694355e-12, -1.5248861118976604e-11, -2.6109050601276754e-11, -3.9356983874089340e-11, -5.0160522247089232e-11, -3.7927752752262918e-11, 7.9971023869689605e-11, 6.4698398391088559e-10, 3.0813696136423188e-9, 8.1302397165247580e-9, -9.2042477170856334e-8], [5.2057332071977420e-15, 4.7378106668625391e-14, 1.3431610115934829e-13, 2.6980699292818643e-13, 4.5385062916465950e-13, 6.6677091840323956e-13, 8.1977134899691566e-13, 6.0390329284889327e-13, -9.2575365564393725e-13, -5.7077499476137586e-12, -2.1348105418980563e-12, 2.9688771299107606e-10, -1.3754461183241490e-9], [8.7671801974467761e-17, 8.2108777901435322e-16, 2.4742645692713402e-15, 5.5042189617502953e-15, 1.0861370503958776e-14, 2.0496613168107605e-14, 3.8460474538546322e-14, 7.2893467159925972e-14, 1.3571095060979812e-13, 1.9690438598021634e-13, -2.8233168635186214e-13, -1.2728036608204110e-12, 2.0819741684976531e-11], [2.0107169400926810e-18, 1.8265834014635592e-17, 5.1648833570718148e-17, 1.0373381076419483e-16, 1.7637617905292903e-16, 2.7126787773741900e-16, 3.9264429552889655e-16, 5.7581091938024756e-16, 1.0808508581375939e-15, 3.4371703592538165e-15, 1.0043071375314759e-14, -1.4646764710338879e-13, 1.5412829836262649e-12], [-3.3586795029339925e-20, -3.1173567730261559e-19, -9.2244583406373910e-19, -1.9970521986634733e-18, -3.8090270337336393e-18, -6.9531112817479234e-18, -1.2885626001587712e-17, -2.5733270193659309e-17, -5.8512164688932494e-17, -1.4639907088911724e-16, -1.9676474841503301e-16, -7.4631842086812039e-16, 2.5977408080181392e-14], [-2.6445135340357880e-21, -2.4463101755725187e-20, -7.1845667296985569e-20, -1.5339516369167329e-19, -2.8527560095043337e-19, -4.9672682857185076e-19, -8.4119093918647710e-19, -1.4215914403710812e-18, -2.4816627583372716e-18, -5.0576718772588141e-18, -1.5038855785135322e-17, 4.7090456044991759e-17, -4.3519138290638217e-16], [-6.1004286689463079e-23, -5.6039184463478171e-22, -1.6227271791958539e-21, -3.3909501865196922e-21, -6.1262002553850121e-21, -1.0288111334414755e-20, -1.6690181106837176e-20, -2.6714340927936296e-20, -4.1749723214323794e-20, -5.5438114789159878e-20, -8.4690952631437946e-20, 2.1696710128861016e-19, -2.8601339054203369e-17], [-6.3029593657556468e-26, -4.9403834139095262e-25, -9.1358001155168008e-25, -1.4544808885797207e-25, 4.5366095236959601e-24, 1.9449307693294720e-23, 5.9611719045426462e-23, 1.6157189593115595e-22, 4.1739435539066954e-22, 1.1755354595255594e-21, 5.9951370041129781e-21, -2.1757060199084691e-20, -3.6764378994525668e-19], [3.5096145219795941e-26, 3.2481696772991712e-25, 9.5498281269012972e-25, 2.0429386678830664e-24, 3.8128741011024117e-24, 6.6848947617089185e-24, 1.1480175438795337e-23, 1.9940042397909022e-23, 3.6079693742374264e-23, 6.7752880338721276e-23, 1.3341742858649035e-22, 1.2534172156177886e-22, 1.0865193589130464e-20]],
        [[1.2403948315620098e-3, 1.1299047088619922e-2, 3.2167965800226830e-2, 6.5500948516691433e-2, 1.1421502628485183e-1, 1.8322303283273300e-1, 2.8092786327340865e-1, 4.2248184221358878e-1, 6.3772354378105316e-1, 9.9387166200038299e-1, 1.6782052699832807e+0, 3.4522467516359574e+0, 13.937780006957260e+0], [-3.4840329429428407e-5, -3.1995653104664486e-4, -9.2610175757082884e-4, -1.9346764557148804e-3, -3.4963487394137063e-3, -5.8819930096116691e-3, -9.5940480786528414e-3, -1.5630060031853540e-2, -2.6186844750548745e-2, -4.6896408919161400e-2, -9.6001819930594210e-2, -2.6207046777404103e-1, -1.6195976035096653e+0], [3.6384873195003223e-7, 3.3644180385138787e-6, 9.8749323807017450e-6, 2.1077414074867170e-5, 3.9242951200313546e-5, 6.8659977819865895e-5, 1.1776581530023821e-4, 2.0447863639986547e-4, 3.7131837331742729e-4, 7.3645089357195902e-4, 1.7153356578587181e-3, 5.4538604572144947e-3, 3.6106651435412256e-2], [-3.4722657626927012e-9, -3.2218634162845602e-8, -9.5229132273166885e-8, -2.0543746263154154e-7, -3.8807256873451003e-7, -6.9164197496373443e-7, -1.2133475733463861e-6, -2.1626908278113683e-6, -4.0390060765032020e-6, -8.1999414269820600e-6, -1.8983654398201746e-5, -5.1645102718971743e-5, -6.7486155325653275e-5], [3.0183755097661433e-11, 2.7973955419842913e-10, 8.2463934899736731e-10, 1.7704864859621455e-9, 3.3171329984253356e-9, 5.8297483949216469e-9, 9.9798315962163682e-9, 1.7006302624719051e-8, 2.9023391179580404e-8, 4.7568250694083824e-8, 4.8434920294207636e-8, -3.6949324338533869e-7, -4.6667569492795272e-6], [-1.2794985048448376e-13, -1.1662566629102258e-12, -3.3140560690762780e-12, -6.6646964779564295e-12, -1.1147355067206041e-11, -1.5875836701576828e-11, -1.6837416338376716e-11, 1.8400902273464352e-12, 1.0455103490281590e-10, 5.8222966358631320e-10, 2.9608195500629160e-9, 1.4286583213415418e-8, -1.1180559643335749e-7], [8.2047817613027521e-15, 7.5249953575403899e-14, 2.1701370310034115e-13, 4.4953886416844045e-13, 7.9778834370539603e-13, 1.2924541088455769e-12, 1.9489165482251835e-12, 2.6735067364222120e-12, 2.8874282627829030e-12, 2.5455912830906412e-13, -7.4459507010771157e-12, 1.9421252872918505e-10, -6.7154606553828386e-13], [1.0729173041197161e-16, 9.9169488406989530e-16, 2.9098912012223040e-15, 6.2169765273945474e-15, 1.1622313584284113e-14, 2.0532209025660963e-14, 3.5831284492559590e-14, 6.3545363190751088e-14, 1.1452595125113304e-13, 1.8035365528590885e-13, -1.9148362965693363e-13, -6.0232612604959917e-12, 7.9085559414124555e-11], [-1.6937186480830145e-18, -1.5987077196110179e-17, -4.8886966043788283e-17, -1.1090651488281123e-16, -2.2371428944705434e-16, -4.3144478910896553e-16, -8.2612278237166630e-16, -1.6022914086162005e-15, -3.1405924020748263e-15, -5.7993829256956461e-15, -7.7895426180452930e-15, -1.3942157653905925e-13, 1.8338588452470724e-12], [-1.8484588877739215e-19, -1.7063571285018087e-18, -4.9910481100377200e-18, -1.0595404348044634e-17, -1.9577551774661926e-17, -3.3918891149611841e-17, -5.7529331726931561e-17, -9.8965783981383208e-17, -1.8004998108667383e-16, -3.6515501985414257e-16, -7.5953839599459133e-16, 1.0981734393176975e-15, -1.8738537319139492e-14], [-4.4274403449847859e-21, -4.0704484955768375e-20, -1.1805018779244086e-19, -2.4716943912267090e-19, -4.4728219908392731e-19, -7.5096327144609729e-19, -1.2121331215245734e-18, -1.9161432877800823e-18, -2.9821492809701552e-18, -4.6205772597972230e-18, -9.5021114148541936e-18, 4.2587451119340888e-17, -1.7558252186837517e-15], [9.5946910242835916e-24, 9.5413066739093962e-23, 3.2009277288672198e-22, 8.1556059044492630e-22, 1.8619645980215362e-21, 4.0538348459655061e-21, 8.7177555672193294e-21, 1.9097996937178671e-20, 4.4539416498165253e-20, 1.2088704162565099e-19, 4.1359319203428555e-19, -8.0094537480375169e-20, -2.1519564487494787e-17], [3.6691487629627761e-24, 3.3919566448448571e-23, 9.9504966858829835e-23, 2.1219037650787138e-22, 3.9446732396921593e-22, 6.8846928211697828e-22, 1.1759852035525110e-21, 2.0261123806245609e-21, 3.6159250170831410e-21, 6.8703050546559980e-21, 1.5637704150498919e-20, 2.0199563624655503e-20, 8.5487549783583290e-19], [1.0924848394744284e-25, 1.0054033469636960e-24, 2.9220891340058140e-24, 6.1403229204584319e-24, 1.1176247786050009e-23, 1.8943270721188148e-23, 3.1087173835072191e-23, 5.0716884438365679e-23, 8.4094199803912914e-23, 1.4344180123121765e-22, 2.2219995812332020e-22, 1.2908041161159306e-21, 3.1614901706634287e-20]],
        [[1.1734987299609895e-3, 1.0684878030076642e-2, 3.0391299276470206e-2, 6.1792744099823613e-2, 1.0752215591568223e-1, 1.7198315503278288e-1, 2.6263769693422573e-1, 3.9277865179464221e-1, 5.8817261433239416e-1, 9.0566857534484913e-1, 1.4992151556020335e+0, 2.9697184002993358e+0, 10.983868029412954e+0], [-3.2088119007314309e-5, -2.9451268741480945e-4, -8.5145207750629407e-4, -1.7754426439479406e-3, -3.2001400803432776e-3, -5.3643386915170986e-3, -8.7074554264736511e-3, -1.4093386520104110e-2, -2.3402088018498765e-2, -4.1384566828672766e-2, -8.3172750705159882e-2, -2.2099600977238322e-1, -1.3354188562008330e+0], [3.2503172405437271e-7, 3.0042190459148432e-6, 8.8101403420497599e-6, 1.8779764595717162e-5, 3.4900784529165969e-5, 6.0915342393725947e-5, 1.0416157086588331e-4, 1.8017275943610427e-4, 3.2572005182646515e-4, 6.4300691902234438e-4, 1.4940973041101045e-3, 4.8087201166734382e-3, 3.4777331225369261e-2], [-2.9982775192337243e-9, -2.7823706968277845e-8, -8.2260072472677685e-8, -1.7754300479239350e-7, -3.3565508360243340e-7, -5.9906970814679696e-7, -1.0535630006938454e-6, -1.8863553923193137e-6, -3.5533360752700781e-6, -7.3441862770311069e-6, -1.7747344321514051e-5, -5.5083715071917709e-5, -1.5918483567971015e-4], [2.9775314635843203e-11, 2.7614553276150792e-10, 8.1531198212644135e-10, 1.7553824210092625e-9, 3.3046547461269611e-9, 5.8554469910503186e-9, 1.0167433624043585e-8, 1.7783265934843438e-8, 3.1980530265238138e-8, 5.9519596618045949e-8, 1.0517127374075768e-7, -5.3218284920018143e-8, -6.6939027589408984e-6], [9.1609916922446428e-14, 8.4799491095291427e-13, 2.4991842424749253e-12, 5.3971843997178216e-12, 1.0332422472991330e-11, 1.9167752762655584e-11, 3.6780838330225892e-11, 7.7818700001888389e-11, 1.9432194454973104e-10, 6.1492573551387967e-10, 2.6628712751492316e-9, 1.6468283055948279e-8, -7.9754852459371516e-8], [9.2298195655418570e-15, 8.4602538422417675e-14, 2.4375199192368491e-13, 5.0447670537677530e-13, 8.9535953936403890e-13, 1.4546810981889255e-12, 2.2142885908121246e-12, 3.1134878871749313e-12, 3.5885483800253497e-12, 5.6913322272169867e-13, -2.0653112644195436e-11, -2.8528864016616491e-11, 2.8310451296750735e-9], [-8.2769900162934782e-17, -7.7218967000079288e-16, -2.3060488228404376e-15, -5.0454345915116586e-15, -9.6852633463615194e-15, -1.7530789813474497e-14, -3.1115373235082666e-14, -5.5782335886816589e-14, -1.0518509994676520e-13, -2.3397316614554557e-13, -9.0128994297748235e-13, -9.5042202309605040e-12, 1.1251694704506293e-10], [-1.0807739743699829e-17, -9.9928058061566129e-17, -2.9324792297535405e-16, -6.2573314284868673e-16, -1.1644361526004392e-15, -2.0353621476891924e-15, -3.4834354355162092e-15, -6.0127377747322802e-15, -1.0720457778398691e-14, -1.9922397864594781e-14, -3.5318845108865629e-14, -6.5896538530859775e-14, -1.8330713266700963e-13], [-2.8079469178893223e-19, -2.5795521859947074e-18, -7.4695396047337064e-18, -1.5603031540808023e-17, -2.8151904803915589e-17, -4.7124809019821745e-17, -7.5990795767441265e-17, -1.2098195596553211e-16, -1.9421386175963571e-16, -3.2236287539282503e-16, -5.2187817830067194e-16, 3.2211136461140185e-15, -9.0575132337806068e-14], [1.9015258159703483e-21, 1.7983741238095900e-20, 5.5190392777882340e-20, 1.2580703379092562e-19, 2.5527291725306355e-19, 4.9641654642859138e-19, 9.6549706677438408e-19, 1.9433600071010190e-18, 4.2006597660172067e-18, 1.0197357824718830e-17, 2.8057241150938097e-17, 7.8842751699470361e-17, -1.3070408221881374e-15], [3.1696464764136483e-22, 2.9284136300631431e-21, 8.5799294386788841e-21, 1.8260130870257998e-20, 3.3848664837357186e-20, 5.8839089065912093e-20, 9.9949724925139888e-20, 1.7099313640151320e-19, 3.0334977984350021e-19, 5.8067397544495890e-19, 1.2994014667507264e-18, 1.8857992254814014e-18, 4.9243543771639128e-17], [8.1359785634291740e-24, 7.4812885511307126e-23, 2.1706577098252406e-22, 4.5490296943509337e-22, 8.2476579893796663e-22, 1.3903023900816253e-21, 2.2637486361872250e-21, 3.6484507905717434e-21, 5.9163317803984376e-21, 9.6465591679812584e-21, 1.4714225565274901e-20, 3.3415373033120754e-20, 1.7011450751927836e-18], [-1.9290931797704092e-26, -1.8784515760324059e-25, -6.0816096796122556e-25, -1.4869866628666540e-24, -3.2639249270360612e-24, -6.8772101475430137e-24, -1.4439421745677904e-23, -3.1123943543419863e-23, -7.1167272961076042e-23, -1.8109960670670995e-22, -5.7539857062920063e-22, -2.0459694363202681e-21, -1.3190847838955694e-20]],
        [[1.0946867337214926e-3, 9.9618096083636438e-3, 2.8302577364527001e-2, 5.7442945782022555e-2, 9.9696234661123570e-2, 1.5889757991793555e-1, 2.4146891174528150e-1, 3.5867324523391258e-1, 5.3189976771881216e-1, 8.0706005062483369e-1, 1.3037698327719379e+0, 2.4620481113073381e+0, 8.0146934016676915e+0], [-4.6310332087761735e-5, -4.2473695562898408e-4, -1.2260922310393211e-3, -2.5506000045493767e-3, -4.5818171014357825e-3, -7.6449314221257972e-3, -1.2331810158953823e-2, -1.9790118737137677e-2, -3.2474534339826282e-2, -5.6453974147849922e-2, -1.1051565364102813e-1, -2.8106229142433019e-1, -1.5875540560793490e+0], [7.2583377589294156e-7, 6.7047171899316997e-6, 1.9637890416319996e-5, 4.1779782949824534e-5, 7.7434683919599521e-5, 1.3466369272266482e-4, 2.2917410684542778e-4, 3.9397417490785448e-4, 7.0658994591939878e-4, 1.3808717493197940e-3, 3.1712302918816411e-3, 1.0150662703270167e-2, 7.9595568809251374e-2], [-9.5492173264293723e-9, -8.8645397953393717e-8, -2.6226003588793182e-7, -5.6667072197316364e-7, -1.0730873974749702e-6, -1.9197814199254407e-6, -3.3880466706309302e-6, -6.0987007715308168e-6, -1.1590739484052610e-5, -2.4358739335038878e-5, -6.1118556169768719e-5, -2.1299437587231228e-4, -1.2644001663911897e-3], [2.2782733483138013e-10, 2.1100206322811288e-9, 6.2130291525834610e-9, 1.3325796650311719e-8, 2.4972567642454645e-8, 4.4046828067721907e-8, 7.6254590598955213e-8, 1.3364551074212994e-7, 2.4412510663813139e-7, 4.7982540085968722e-7, 1.0412396286726634e-6, 2.0409482457618829e-6, -4.6321355238745070e-5], [2.2965408215458500e-12, 2.0983566026202296e-11, 6.0102351688642584e-11, 1.2349581299339811e-10, 2.1801786660166174e-10, 3.5572345038558370e-10, 5.5993838447245414e-10, 8.8636813281044465e-10, 1.5177734420532069e-9, 3.3244883345798964e-9, 1.2552474678432249e-8, 1.0465109564807984e-7, 6.4951953826551817e-7], [-7.4435867271044501e-14, -7.0044394440406876e-13, -2.1296149852705390e-12, -4.7954421426917275e-12, -9.6034577972573780e-12, -1.8462814363960546e-11, -3.5674809132635061e-11, -7.1995659110341924e-11, -1.5855207405217981e-10, -4.0576968644093833e-10, -1.3337655468455543e-9, -6.1698857765535921e-9, 9.3495607125632651e-8], [-1.7967214605881514e-14, -1.6574112090983968e-13, -4.8403700232723736e-13, -1.0247887862003531e-12, -1.8850102688589740e-12, -3.2403282692359711e-12, -5.4159609635500547e-12, -9.0446699240672852e-12, -1.5445589221762614e-11, -2.7652678914429868e-11, -5.4740335780095898e-11, -1.9357165211959921e-10, 2.7282776824767551e-10], [-4.9995928777013564e-16, -4.5788683838784382e-15, -1.3174290766137445e-14, -2.7236097497264449e-14, -4.8385256827252262e-14, -7.9157224077677533e-14, -1.2321846133974179e-13, -1.8477603642083361e-13, -2.6234531556578375e-13, -3.0198782543597505e-13, 2.4712406800607752e-13, 9.4156279957657849e-12, -1.8689079923265278e-10], [3.0984442376910270e-17, 2.8766679376195920e-16, 8.5127677013426782e-16, 1.8399203703996306e-15, 3.4850917896709223e-15, 6.2350905058855750e-15, 1.0997483621007440e-14, 1.9756832314908707e-14, 3.7339969853467297e-14, 7.7238955893371823e-14, 1.8452055043204748e-13, 6.1373248511286803e-13, -3.3722218038262099e-12], [2.7600083842930735e-18, 2.5442337063366945e-17, 7.4199667818969983e-17, 1.5677004033311599e-16, 2.8759583230420266e-16, 4.9283347218564804e-16, 8.2109310122228328e-16, 1.3678724152713355e-15, 2.3359556499556811e-15, 4.1966320871549833e-15, 8.0179051015501252e-15, 6.8142460213963168e-15, 3.3040795986018979e-13], [2.9964039498972643e-20, 2.7096095675188119e-19, 7.5852036508036807e-19, 1.4960624261010748e-18, 2.4604421696158889e-18, 3.5308624629238275e-18, 4.2746183347354598e-18, 3.2486268404660192e-18, -4.5707667987005383e-18, -3.9046588897909131e-17, -1.9714455512648232e-16, -1.1521507269657812e-15, 1.1093639083933007e-14], [-6.3615253934076356e-21, -5.8881375244684173e-20, -1.7316914056641126e-19, -3.7075769902010351e-19, -6.9323798799977792e-19, -1.2196781918301051e-18, -2.1068667568183736e-18, -3.6906114748572627e-18, -6.7747093312635297e-18, -1.3611732691084010e-17, -3.2158862909271554e-17, -9.2690230791391070e-17, -4.9588290405934147e-16], [-3.6207553220460295e-22, -3.3360508410924064e-21, -9.7194568165577486e-21, -2.0503307577249463e-20, -3.7530294407317801e-20, -6.4118700535751908e-20, -1.0638178488339473e-19, -1.7615457109605241e-19, -2.9784992494328296e-19, -5.2435069370245062e-19, -9.5298208782784133e-19, -1.3022631712933581e-18, -2.5380300169258930e-17]],
        [[1.0075549595556857e-3, 9.1630221923231849e-3, 2.5998756964968202e-2, 5.2657075756600958e-2, 9.1116204953833676e-2, 1.4462069163301781e-1, 2.1852478782104933e-1, 3.2203894781638577e-1, 4.7221007313491737e-1, 7.0436597585215488e-1, 1.1059898902173172e+0, 1.9734952652561788e+0, 5.4205359993261669e+0], [-4.0898108372371656e-5, -3.7476272380457083e-4, -1.0798388356638931e-3, -2.2398418902498578e-3, -4.0068997010624026e-3, -6.6475673408366195e-3, -1.0640019338133223e-2, -1.6894410776601254e-2, -2.7311531441474907e-2, -4.6445335059534977e-2, -8.7790705251476059e-2, -2.0942455673105934e-1, -1.0223391307094909e+0], [6.3381357133525964e-7, 5.8497977434221808e-6, 1.7104419193547319e-5, 3.6291867907688336e-5, 6.7006446647451966e-5, 1.1592323832749620e-4, 1.9591104569600135e-4, 3.3366153654113073e-4, 5.9087207489115226e-4, 1.1344343054174045e-3, 2.5392348155501406e-3, 7.8306632536146535e-3, 6.0776265806171684e-2], [-5.8168384464897585e-9, -5.4128622207482588e-8, -1.6092387632733457e-7, -3.5029507292346447e-7, -6.7004526388144243e-7, -1.2142975639659666e-6, -2.1777688180122528e-6, -3.9988525040714104e-6, -7.7914353458386040e-6, -1.6919650786155369e-5, -4.4601225271520582e-5, -1.7261946905470624e-4, -1.7896792405986010e-3], [2.1277680642006150e-10, 1.9646661023419436e-9, 5.7496978383222343e-9, 1.2217376788185141e-8, 2.2606131974217130e-8, 3.9231121265802128e-8, 6.6592156785716764e-8, 1.1410671630747575e-7, 2.0371185424062592e-7, 3.9470704062363017e-7, 8.8381902334335760e-7, 2.4717671212027423e-6, -1.3861844723000412e-5], [-5.6098422420165614e-12, -5.2118728970233452e-11, -1.5442847318964115e-10, -3.3432616781094275e-10, -6.3429998046545852e-10, -1.1358927145543239e-9, -2.0017133325938825e-9, -3.5786685284229671e-9, -6.6767318100975695e-9, -1.3399642642561591e-8, -2.9568641012512126e-8, -5.5902139241742777e-8, 2.3021287721391262e-6], [-5.0251764484612781e-13, -4.6287275384246282e-12, -1.3477919466214904e-11, -2.8407439136421865e-11, -5.1940537660263068e-11, -8.8628274710592895e-11, -1.4691092055684808e-10, -2.4344765913529970e-10, -4.1446501545934833e-10, -7.5156054930020031e-10, -1.5573037527065929e-9, -4.5894345634056068e-9, 2.0218559648617461e-8], [4.0072419133476591e-16, 5.1256918776717054e-15, 2.3579166481329358e-14, 7.8764565484914551e-14, 2.2143963782921801e-13, 5.6428391888411634e-13, 1.3709287494219650e-12, 3.3116558328020048e-12, 8.3057736610303734e-12, 2.2879734711564734e-11, 7.5765649518200989e-11, 3.4957531295030628e-10, -4.6946524896103423e-9], [1.7810960492465465e-15, 1.6449361064548207e-14, 4.8157301628675431e-14, 1.0235888911336379e-13, 1.8937276994404313e-13, 3.2823917846662277e-13, 5.5520019544198933e-13, 9.4363075404102270e-13, 1.6555526199714654e-12, 3.0913986683683932e-12, 6.3851657067981701e-12, 1.5348289240963003e-11, -3.8223829941316349e-11], [4.2128389978377561e-17, 3.8457902608376762e-16, 1.0988120239236672e-15, 2.2449547491082522e-15, 3.9136674309681113e-15, 6.2115852816673251e-15, 9.1852201628639296e-15, 1.2495133646587189e-14, 1.3997677192295954e-14, 2.6705983971323631e-15, -8.7734638824170474e-14, -8.8778193377173252e-13, 1.0020969451308128e-11], [-4.8555989163885331e-18, -4.4982709559356820e-17, -1.3252958571315240e-16, -2.8451078411820372e-16, -5.3388452045125785e-16, -9.4349502881341288e-16, -1.6382214314971106e-15, -2.8854110431903932e-15, -5.3208681136823094e-15, -1.0687164772699449e-14, -2.4717581958741214e-14, -6.8549890420635883e-14, 9.5079938787876606e-14], [-2.5781715590033199e-19, -2.3712435332448299e-18, -6.8827641862996178e-18, -1.4430394080955568e-17, -2.6168208951507561e-17, -4.4084620497474186e-17, -7.1593227462564690e-17, -1.1454842296751766e-16, -1.8235906844171889e-16, -2.8317833089645597e-16, -3.4206378189551656e-16, 1.2139200633683935e-15, -1.9932647889767548e-14], [9.4340777529428153e-21, 8.7867713022547609e-20, 2.6171748505865086e-19, 5.7139894071043480e-19, 1.0977127337417726e-18, 2.0013686003797218e-18, 3.6189555990381324e-18, 6.7190622807433336e-18, 1.3283631389516953e-17, 2.9366202280940864e-17, 7.8481295618482369e-17, 2.8228296805320861e-16, -2.7813279410511624e-16], [1.0809725997194863e-21, 9.9779808307704786e-21, 2.9179479962233757e-20, 6.1914655568913388e-20, 1.1426718324977336e-19, 1.9738974592211867e-19, 3.3229645212322265e-19, 5.6080793242814136e-19, 9.7220228177293423e-19, 1.7691695884841234e-18, 3.3564280404825556e-18, 3.5693190978976198e-18, 3.1777405259882025e-17]],
        [[9.3064106220388550e-4, 8.4585413408679572e-3, 2.3970685268304358e-2, 4.8456293550322844e-2, 8.3616459584329063e-2, 1.3221278881542565e-1, 1.9873940409569177e-1, 2.9078472486537070e-1, 4.2204860726821020e-1, 6.1996727468848963e-1, 9.4916226424404788e-1, 1.6111374563935839e+0, 3.7936804907240962e+0], [-3.6061213677295994e-5, -3.3014185256885675e-4, -9.4949867849951265e-4, -1.9637155466052068e-3, -3.4982045411462775e-3, -5.7701608060748195e-3, -9.1632285610879658e-3, -1.4393131003448636e-2, -2.2915991538882948e-2, -3.8099568589529174e-2, -6.9430484509934416e-2, -1.5449769693512055e-1, -6.2235081621739602e-1], [5.7890944555257413e-7, 5.3376829316921102e-6, 1.5574757844335400e-5, 3.2938859267061653e-5, 6.0533665648370290e-5, 1.0405963936959954e-4, 1.7434985260048525e-4, 2.9346713656225530e-4, 5.1123051957468389e-4, 9.5829306690000525e-4, 2.0655330156008556e-3, 5.9506229592128009e-3, 3.9455267976648758e-2], [-3.8435860128697995e-9, -3.5933530147721510e-8, -1.0781959151512093e-7, -2.3790977793209106e-7, -4.6318510788800052e-7, -8.5753287831338650e-7, -1.5761611470145809e-6, -2.9737293825600787e-6, -5.9637134000714331e-6, -1.3338196944916695e-5, -3.6186067065025888e-5, -1.4418981430208841e-4, -1.6597596008291742e-3], [1.4162373831424304e-11, 1.2968012961926624e-10, 3.7358592479171325e-10, 7.7753469836217196e-10, 1.4093023015312359e-9, 2.4201805274754704e-9, 4.1843851162354523e-9, 7.7600798073088500e-9, 1.6668574819119520e-8, 4.5366815747322607e-8, 1.7431570221305367e-7, 1.1578683912071279e-6, 2.7042398290862061e-5], [-1.1338428837674083e-11, -1.0440963696724748e-10, -3.0383041212180798e-10, -6.3967944540177603e-10, -1.1674409925371473e-9, -1.9858678282960613e-9, -3.2739749964537410e-9, -5.3708799015727848e-9, -8.9565536848753672e-9, -1.5457024834476366e-8, -2.7483487097823171e-8, -3.4980183115681749e-8, 1.3884210585903059e-6], [2.0601944613234039e-13, 1.9300519165546383e-12, 5.8141719364776989e-12, 1.2900138414220593e-11, 2.5278602361893632e-11, 4.7110051041046939e-11, 8.7052326492314984e-11, 1.6452009846667593e-10, 3.2774805181971368e-10, 7.1397257025327639e-10, 1.7852997884484890e-9, 5.1259507143830306e-9, -7.8818092375288008e-8], [3.6129109918017984e-14, 3.3269873752351343e-13, 9.6815324612217328e-13, 2.0382156201108009e-12, 3.7189865860363129e-12, 6.3224210429958657e-12, 1.0409459950086287e-11, 1.7027834422442903e-11, 2.8224468686019377e-11, 4.8065483035999540e-11, 8.2848275719175128e-11, 1.0192603826825240e-10, -1.0904963176346730e-9], [-7.0003511659406682e-16, -6.5685488129732025e-15, -1.9851506514723220e-14, -4.4267346180360295e-14, -8.7360848219873336e-14, -1.6437593579365947e-13, -3.0767429801600794e-13, -5.9177377657773548e-13, -1.2087904588449473e-12, -2.7375078468148730e-12, -7.3498702695419570e-12, -2.5797809658713852e-11, 1.9291526713489192e-10], [-1.2610784957584877e-16, -1.1618297292583433e-15, -3.3841631392139681e-15, -7.1348746139306291e-15, -1.3043731550036218e-14, -2.2227554544648005e-14, -3.6691974129154281e-14, -6.0153077426420558e-14, -9.9669929018001132e-14, -1.6784097187268450e-13, -2.7025738369777992e-13, -7.5684846599839502e-14, -9.9101898625960714e-13], [2.5797002952630810e-18, 2.4205177765528951e-17, 7.3155014434066270e-17, 1.6316771815182763e-16, 3.2222250208169963e-16, 6.0714172817026979e-16, 1.1393560903537717e-15, 2.2007711728337580e-15, 4.5252405144890742e-15, 1.0347114218092221e-14, 2.8121098523888862e-14, 9.9388682805224158e-14, -4.2858752535283299e-13], [4.3520808557618564e-19, 4.0119580932521630e-18, 1.1700194508334406e-17, 2.4714085297454726e-17, 4.5299600712034879e-17, 7.7459150000584412e-17, 1.2841777189348446e-16, 2.1161353180526863e-16, 3.5249313209052478e-16, 5.9464072864271483e-16, 9.3038875013317004e-16, -3.6307220143413580e-16, 7.6175206276328893e-15], [-9.3118633462179641e-21, -8.7403496876770208e-20, -2.6436530715260334e-19, -5.9045869256359304e-19, -1.1686071020037863e-18, -2.2094123248298557e-18, -4.1672769537598964e-18, -8.1097308539549854e-18, -1.6856083822711831e-17, -3.9133397962734285e-17, -1.0842240706448243e-16, -3.8246724214090720e-16, 9.4761865702325399e-16], [-1.5019529808254217e-21, -1.3856100863291302e-20, -4.0470711161920187e-20, -8.5687774744727396e-20, -1.5757879665422015e-19, -2.7061906950370094e-19, -4.5112538403476247e-19, -7.4835848858222088e-19, -1.2556589323842697e-18, -2.1274396133983371e-18, -3.2441370361868244e-18, 3.3522267368361218e-18, -2.3169626176717337e-17]],
        [[8.6299715508077757e-4, 7.8395319541447325e-3, 2.2192009591149828e-2, 4.4782956822091685e-2, 7.7086039115961789e-2, 1.2147122587652825e-1, 1.8174606689787025e-1, 2.6423054457580171e-1, 3.8007638695324396e-1, 5.5092553092659766e-1, 8.2546708607606026e-1, 1.3444816796395013e+0, 2.8077092137816354e+0], [-3.1624693559841142e-5, -2.8925965809695683e-4, -8.3035036316171576e-4, -1.7121995421435909e-3, -3.0372074296374831e-3, -4.9805761122511095e-3, -7.8468159881525410e-3, -1.2192207431123721e-2, -1.9117793535243969e-2, -3.1077161859923265e-2, -5.4620566384379724e-2, -1.1351001406691805e-1, -3.7758399138908863e-1], [5.2827080553423392e-7, 4.8649500992574026e-6, 1.4160437576223004e-5, 2.9831840866445560e-5, 5.4520797655351809e-5, 9.3013122739827321e-5, 1.5424219028047787e-4, 2.5598856823183545e-4, 4.3722345112987140e-4, 7.9613671655103039e-4, 1.6383518236804788e-3, 4.3290784499377442e-3, 2.2716617298946660e-2], [-4.9051539017204613e-9, -4.5684778828790770e-8, -1.3604069670125095e-7, -2.9675406684172562e-7, -5.6885554326781518e-7, -1.0324902769117079e-6, -1.8514559670770695e-6, -3.3880136023425818e-6, -6.5391035535251142e-6, -1.3913103425488262e-5, -3.5190644097616812e-5, -1.2508648775951141e-4, -1.1069221655261891e-3], [-1.0727907326145310e-10, -9.8265200337231211e-10, -2.8275708474981527e-9, -5.8435191931365877e-9, -1.0363733753578501e-8, -1.6875886693888592e-8, -2.5976805320790393e-8, -3.7950943092179322e-8, -5.0466357209554982e-8, -4.5858239986802906e-8, 9.5087984735117452e-8, 1.5101023952354132e-6, 3.6540890010019583e-5], [3.9274670353437586e-13, 4.0566660117244056e-12, 1.4437551346721064e-11, 3.9112096507349517e-11, 9.4098096626762245e-11, 2.1310794396788015e-10, 4.7010216722671754e-10, 1.0386546356961699e-9, 2.3656911830202101e-9, 5.7538910102909856e-9, 1.5648901543615640e-8, 4.8417395141319393e-8, -2.9615153283484065e-7], [5.0755981447913256e-13, 4.6697194436506156e-12, 1.3563318251334351e-11, 2.8467138285523300e-11, 5.1704664508391455e-11, 8.7312607930349923e-11, 1.4233526719335181e-10, 2.2930235584042323e-10, 3.7054278866700105e-10, 6.0087010817307669e-10, 9.0772187076449695e-10, 9.6806679766689463e-11, -4.5316074457354433e-8], [-1.6873197327189491e-14, -1.5698885853781003e-13, -4.6650963681781899e-13, -1.0143692664108374e-12, -1.9357833727161944e-12, -3.4922199271341851e-12, -6.2099498399102262e-12, -1.1225230077149659e-11, -2.1239461911941492e-11, -4.3530952789232842e-11, -1.0080901252047623e-10, -2.6074477167141567e-10, 2.3811630492231404e-9], [-1.1824189140326498e-15, -1.0834958422901413e-14, -3.1206375472995054e-14, -6.4607044897532139e-14, -1.1496189613400701e-13, -1.8834961756706216e-13, -2.9337971470962800e-13, -4.3948928712928835e-13, -6.2303615985828768e-13, -7.4317069329447073e-13, -4.1247217148319130e-14, 7.8065041005306497e-12, -9.7030788688441470e-14], [8.7547322993869051e-17, 8.1061681518407256e-16, 2.3854705602917866e-15, 5.1105036459240069e-15, 9.5572289209677392e-15, 1.6796509748204675e-14, 2.8901566873057670e-14, 5.0140661696760794e-14, 9.0062395810684073e-14, 1.7224984181957815e-13, 3.5937440843331623e-13, 7.3626314591573758e-13, -5.1960235106474795e-12], [1.5466091042006643e-18, 1.3942316537042894e-17, 3.8759319263510938e-17, 7.5485308680419480e-17, 1.2135643271883100e-16, 1.6658909084545134e-16, 1.8063563244740100e-16, 6.9454437439616832e-17, -4.7301329313464938e-16, -2.5691744371039834e-15, -1.1220552268405341e-14, -5.5272170348355204e-14, 1.8982371143876484e-13], [-3.3053095487287555e-19, -3.0523257077501523e-18, -8.9334367843655888e-18, -1.8975045844001928e-17, -3.5053235112739633e-17, -6.0573633843435048e-17, -1.0184352468576122e-16, -1.7104160619327946e-16, -2.9276409112365171e-16, -5.1666245015827740e-16, -9.0625791867124777e-16, -7.0881716881580704e-16, 5.6703381148526622e-15], [3.7422178361983541e-21, 3.5749481084360641e-20, 1.1181891603404614e-19, 2.6163556542986006e-19, 5.4749497416179853e-19, 1.1002358026545053e-18, 2.2088767284491355e-18, 4.5643961869114288e-18, 1.0005533503017889e-17, 2.4171384000092281e-17, 6.7765631851181935e-17, 2.2432344583510715e-16, -6.6072491437520335e-16], [9.8810382820474111e-22, 9.0987210359464903e-21, 2.6471693612072733e-20, 5.5690352467422667e-20, 1.0142639315010445e-19, 1.7169626789910711e-19, 2.8007538615880094e-19, 4.4897110476653438e-19, 7.1017454661655428e-19, 1.0654619751370665e-18, 1.0547679420720613e-18, -5.3637985741558624e-18, 7.0978026970330005e-18]],
        [[8.0376944623165813e-4, 7.2980310007231562e-3, 2.0638950460510164e-2, 4.1584969907494468e-2, 7.1424488673890879e-2, 1.1221226700124481e-1, 1.6721205868273275e-1, 2.4175991895714595e-1, 3.4508411933985024e-1, 4.9461052556601854e-1, 7.2803163562865360e-1, 1.1476740571934310e+0, 2.1987535042122727e+0], [-2.7659238217613776e-5, -2.5276357010837623e-4, -7.2425586182869741e-4, -1.4891354021543905e-3, -2.6306920763603350e-3, -4.2897482033718353e-3, -6.7072242580243846e-3, -1.0314303022860245e-2, -1.5941924183495135e-2, -2.5376571301880830e-2, -4.3149923854552564e-2, -8.4405991358835430e-2, -2.3977174893457683e-1], [4.6096999312775943e-7, 4.2397661429922044e-6, 1.2308486318462628e-5, 2.5824018899937767e-5, 4.6920367975070736e-5, 7.9407200065969552e-5, 1.3026017196506121e-4, 2.1302506234109314e-4, 3.5645999191115258e-4, 6.2999857211961602e-4, 1.2369824446402694e-3, 3.0002080299476268e-3, 1.2612805578722255e-2], [-6.0977365242202838e-9, -5.6528857987993301e-8, -1.6676271190555258e-7, -3.5861808594838447e-7, -6.7419494636660270e-7, -1.1932796795192966e-6, -2.0730424784372584e-6, -3.6461829906143680e-6, -6.6941759903803456e-6, -1.3344972123322960e-5, -3.0829901066625111e-5, -9.4855893780488291e-5, -6.0774520396139977e-4], [-2.5956543469749356e-11, -2.2832852058800377e-10, -5.9997543419840600e-10, -1.0469426375426968e-9, -1.3359075518493332e-9, -8.9305667867484044e-10, 1.7335143615555055e-9, 1.0441853041174194e-8, 3.6755352563928060e-8, 1.2021316712324732e-7, 4.3271983169232277e-7, 2.1076475302161741e-6, 2.4611019055421160e-5], [5.3965329163573680e-12, 4.9749788453040676e-11, 1.4509021221950871e-10, 3.0643697729680382e-10, 5.6142892748231799e-10, 9.5892881150163548e-10, 1.5861400080229094e-9, 2.6027516996102753e-9, 4.3054452492800955e-9, 7.1974311079978555e-9, 1.1350357519988526e-8, 1.7342163179241272e-9, -7.0112663022082247e-7], [-6.3857857365329149e-14, -6.0567521200419529e-13, -1.8682750439488270e-12, -4.2848766914590996e-12, -8.7410646753730320e-12, -1.7035346591567640e-11, -3.2983650219514592e-11, -6.5285324824960399e-11, -1.3581998852338937e-10, -3.0732484324119448e-10, -7.9336270236422890e-10, -2.4404725910301782e-9, 4.1989916975639869e-9], [-1.3037454775201399e-14, -1.1957879185827697e-13, -3.4508624624167370e-13, -7.1677218946688239e-13, -1.2818547787689202e-12, -2.1163977990789136e-12, -3.3372681985746763e-12, -5.1066023520756390e-12, -7.5579803721581544e-12, -1.0195569617795600e-11, -7.4186321436602180e-12, 5.5116574706170041e-11, 8.9485402614889588e-10], [8.1009077688130436e-16, 7.4908420584990505e-15, 2.1983816628826455e-14, 4.6894495247812378e-14, 8.7157743908297670e-14, 1.5187520682035527e-13, 2.5829794440676675e-13, 4.4094352872194947e-13, 7.7400269736372189e-13, 1.4296366489329365e-12, 2.8107515506270384e-12, 4.9645645918474265e-12, -5.3897917755010021e-11], [-5.7547440606918480e-19, -8.2174466559456254e-18, -4.1465342365775681e-17, -1.4594864552036309e-16, -4.2131404123346023e-16, -1.0852361852697457e-15, -2.6347821953184288e-15, -6.2880234864650348e-15, -1.5336992640166074e-14, -3.9950153986671518e-14, -1.1767112391976351e-13, -4.1183917721778831e-13, 1.0803031604816914e-12], [-2.3075560201382623e-18, -2.1209577693654423e-17, -6.1475639401962537e-17, -1.2857822868780096e-16, -2.3226775427817049e-16, -3.8893587909349140e-16, -6.2562601332323301e-16, -9.8560057437903797e-16, -1.5283606027872739e-15, -2.2629497579880290e-15, -2.4929270239036112e-15, 6.1147438033524950e-15, 5.1566524512135066e-14], [1.0762629353111540e-19, 9.9837917861594947e-19, 2.9489246114549885e-18, 6.3528413962237266e-18, 1.1968755961512766e-17, 2.1228588072123691e-17, 3.6924084988473262e-17, 6.4831581538120620e-17, 1.1787452179929402e-16, 2.2760465696865203e-16, 4.7402722868146378e-16, 9.2061515282144914e-16, -4.8259685386783308e-15], [1.6978969776548667e-21, 1.5172873471004125e-20, 4.1361390296761900e-20, 7.7688854356367580e-20, 1.1671712576703843e-19, 1.3810741328754816e-19, 8.6640899621099063e-20, -1.9270523417630480e-19, -1.1683701456416872e-18, -4.4337160682244629e-18, -1.6403778948460272e-17, -6.7062885292382611e-17, 1.3388018503274914e-16], [-3.8456657608176769e-22, -3.5427775549687619e-21, -1.0316863876971667e-20, -2.1736408492371500e-20, -3.9673770533555422e-20, -6.7373578972432893e-20, -1.1043172549924512e-19, -1.7846064970785779e-19, -2.8688673859733319e-19, -4.4985301120213051e-19, -5.7259532143041605e-19, 8.3562456764674986e-19, 3.8459559377981461e-18]],
        [[7.5190684167985858e-4, 6.8242743212334765e-3, 1.9282583120565670e-2, 3.8799733083309030e-2, 6.6513083072097015e-2, 1.0422334268168302e-1, 1.5476260217273781e-1, 2.2270113649632430e-1, 3.1580810469024452e-1, 4.4841880622903622e-1, 6.5054645754185679e-1, 9.9965465589437054e-1, 1.8010817112166831e+0], [-2.4263985247201589e-5, -2.2155425761315258e-4, -6.3376200298687380e-4, -1.2996346844786538e-3, -2.2873141057288645e-3, -3.7107614786648711e-3, -5.7621428697599496e-3, -8.7790156039449081e-3, -1.3396356842153024e-2, -2.0936280001624768e-2, -3.4605453969032656e-2, -6.4398784226111076e-2, -1.6234712215467629e-1], [3.8837531382938808e-7, 3.5677475395033070e-6, 1.0331789035224974e-5, 2.1592304279971887e-5, 3.9014417794914191e-5, 6.5529292604777229e-5, 1.0640648878913806e-4, 1.7164222022758297e-4, 2.8183162480047015e-4, 4.8476686118784963e-4, 9.1284086173238388e-4, 2.0569877013346746e-3, 7.2535086635422335e-3], [-5.8089755192421593e-9, -5.3707293012598174e-8, -1.5757435553767197e-7, -3.3600541986054079e-7, -6.2428597045200818e-7, -1.0877969781154035e-6, -1.8517375700991350e-6, -3.1720879971354067e-6, -5.6248529420632280e-6, -1.0694713772278840e-5, -2.3063345812173698e-5, -6.3340136969050486e-5, -3.1512780330422930e-4], [5.0546603269072389e-11, 4.7435446741612022e-10, 1.4337827250155485e-9, 3.1966100749488995e-9, 6.3021721059654511e-9, 1.1828585974188618e-8, 2.2031704448797246e-8, 4.2008668781344971e-8, 8.4590515479764678e-8, 1.8736870247602217e-7, 4.8836012381192034e-7, 1.7261075860467708e-6, 1.2796208650871003e-5], [1.9806902403185553e-12, 1.8067137996025679e-11, 5.1533389378216246e-11, 1.0497610578652331e-10, 1.8212460777250820e-10, 2.8678832314254035e-10, 4.1845559517901826e-10, 5.5532125025928134e-10, 5.8622099682351369e-10, 8.4187260347789173e-13, -3.8853971145558214e-9, -3.1302188639825071e-8, -4.5246781833460931e-7], [-1.4452814214064546e-13, -1.3329352234260453e-12, -3.8907916827726257e-12, -8.2294943711369865e-12, -1.5111100401498617e-11, -2.5896835990275586e-11, -4.3055380465193142e-11, -7.1229316546552903e-11, -1.1949648045780776e-10, -2.0553256336929264e-10, -3.5214821629271903e-10, -3.3661166994831889e-10, 1.1977569037931342e-8], [3.4058431920887635e-15, 3.1748463751137120e-14, 9.4698337963744347e-14, 2.0704005990904744e-13, 3.9788392837913948e-13, 7.2374121949031282e-13, 1.2987088117227200e-12, 2.3694756678026281e-12, 4.5218731932417217e-12, 9.3283175075015426e-12, 2.1694564024621682e-11, 5.8057221870413577e-11, -1.0572683727883449e-10], [1.4424081166693882e-16, 1.3108802927541820e-15, 3.7101335565320136e-15, 7.4614656656526516e-15, 1.2690962724047094e-14, 1.9376253372554038e-14, 2.6845483841585128e-14, 3.2108245141691449e-14, 2.3830845057821787e-14, -4.2553832590062173e-14, -3.7127075918866763e-13, -2.1923310832168986e-12, -1.1184611139970156e-11], [-1.6655091598808589e-17, -1.5328674752191454e-16, -4.4553977577188065e-16, -9.3609438108012809e-16, -1.7025466976807616e-15, -2.8797422819812186e-15, -4.7027965955959571e-15, -7.5885832161044695e-15, -1.2274071299085932e-14, -1.9885954999356756e-14, -2.9989790277087606e-14, -8.2397961347882351e-15, 8.0177896600001478e-13], [6.1074885292822178e-19, 5.6637076319597087e-18, 1.6717883708130944e-17, 3.5977353317401709e-17, 6.7678996841022129e-17, 1.1979192449309069e-16, 2.0779065056823414e-16, 3.6356699727213806e-16, 6.5831263321120368e-16, 1.2667051510196891e-15, 2.6496076255595283e-15, 5.5612733670318211e-15, -2.7449989457413868e-14], [5.2632796173781306e-21, 4.5915566993925898e-20, 1.1827953276949454e-19, 1.9785587324413416e-19, 2.2618463680073607e-19, 6.4845401936847651e-20, -6.2371322475694712e-19, -2.7098398808575198e-18, -8.6364576797074553e-18, -2.6146851791884659e-17, -8.4209996618762482e-17, -3.0937635168270258e-16, 2.2028770602016710e-16], [-1.7424015458644644e-21, -1.5998309724244684e-20, -4.6269713394825969e-20, -9.6433561885657630e-20, -1.7328826803764310e-19, -2.8796902959030092e-19, -4.5806161883219219e-19, -7.0939943229170329e-19, -1.0692900747562567e-18, -1.4962589191385756e-18, -1.3413622017997064e-18, 5.4323989609499616e-18, 3.4088378812117044e-17], [8.4451242325544025e-23, 7.8151607457445804e-22, 2.2970093891625505e-21, 4.9103314433499742e-21, 9.1500416069055892e-21, 1.5987688511240285e-20, 2.7250727471407576e-20, 4.6539187494132703e-20, 8.1350477601864877e-20, 1.4790391886654705e-19, 2.7668093016595007e-19, 3.9416125700480713e-19, -2.3090485310108379e-18]],
        [[7.0627616030465084e-4, 6.4077699908778364e-3, 1.8092034767570326e-2, 3.6361115461426125e-2, 6.2228171508040363e-2, 9.7287159999358168e-2, 1.4402366045750666e-1, 2.0640401408034362e-1, 2.9107261697975357e-1, 4.1005311105542334e-1, 5.8785041350654624e-1, 8.8520565605179248e-1, 1.5245038578048418e+0], [-2.1420099271817484e-5, -1.9544336746432882e-4, -5.5823097097468571e-4, -1.1420545283643509e-3, -2.0032813130010536e-3, -3.2352714898938503e-3, -4.9934473259244436e-3, -7.5463590664413499e-3, -1.1388602747598597e-2, -1.7521857778029929e-2, -2.8284922002703199e-2, -5.0561952935000479e-2, -1.1655787279889069e-1], [3.2431581540179370e-7, 2.9760109035358348e-6, 8.5988362058146542e-6, 1.7907510341307605e-5, 3.2195475990935185e-5, 5.3710967225001127e-5, 8.6429667292501097e-5, 1.3773705671381855e-4, 2.2244937413524399e-4, 3.7377351501729551e-4, 6.7940151424959322e-4, 1.4417120586439177e-3, 4.4484803967323600e-3], [-4.8354602654902658e-9, -4.4627890478327447e-8, -1.3046517774784583e-7, -2.7664347147283919e-7, -5.0995357678837022e-7, -8.7919443316315981e-7, -1.4757948900366145e-6, -2.4816765648041876e-6, -4.2924932271154015e-6, -7.8842183543895496e-6, -1.6155097180981678e-5, -4.0752589468208506e-5, -1.6862547783490060e-4], [6.4135973962582706e-11, 5.9614677957186468e-10, 1.7680001442516493e-9, 3.8323514265072376e-9, 7.2813298614532483e-9, 1.3058045425910480e-8, 2.3041521365414485e-8, 4.1249044813869564e-8, 7.7177648671333258e-8, 1.5667210593337248e-7, 3.6625209585823170e-7, 1.1125933491934581e-6, 6.2607558461627240e-6], [-2.1518063405422281e-13, -2.1266863002088106e-12, -7.0633580251508625e-12, -1.7801478772694161e-11, -4.0259813562124277e-11, -8.7062042212247094e-11, -1.8645054947760933e-10, -4.0660844657988040e-10, -9.3063319744766344e-10, -2.3298769414876884e-9, -6.8350568043125793e-9, -2.7092440386239544e-8, -2.2108137469031529e-7], [-4.3260893922394675e-14, -3.9578669080202865e-13, -1.1360746468005946e-12, -2.3387573346089220e-12, -4.1249196875551409e-12, -6.6655839897686286e-12, -1.0153320773855297e-11, -1.4621055403123983e-11, -1.9057552509163998e-11, -1.6930952022693765e-11, 3.1168630911079614e-11, 4.4283764739332238e-10, 7.0275131280264265e-9], [2.6751158029127651e-15, 2.4649603570520612e-14, 7.1820277925547910e-14, 1.5148150712228662e-13, 2.7706480159323044e-13, 4.7236378008148605e-13, 7.8005888814445059e-13, 1.2792446421758904e-12, 2.1213123826127410e-12, 3.5898795635641211e-12, 5.9952475128134429e-12, 5.3531385030187586e-12, -1.7922495149234673e-10], [-8.7496476319568337e-17, -8.1066602606958231e-16, -2.3886583074373720e-15, -5.1270086112045276e-15, -9.6118199756026517e-15, -1.6943301243135854e-14, -2.9255744171255500e-14, -5.0954072198135234e-14, -9.1937617628760112e-14, -1.7697683483064639e-13, -3.7562319036761711e-13, -8.6507302971397997e-13, 2.3458724640596427e-12], [3.1492168838290382e-19, 3.1957970278392227e-18, 1.1074410464744804e-17, 2.9218303535935090e-17, 6.8815320467694021e-17, 1.5357431731203476e-16, 3.3600814903671107e-16, 7.4098255189726051e-16, 1.6960125879383330e-15, 4.1834017094464693e-15, 1.1747370973618534e-14, 4.0504953254620923e-14, 8.6620238120410345e-14], [1.5428513351183249e-19, 1.4114353258694972e-18, 4.0512373688231622e-18, 8.3416314255547525e-18, 1.4725371154775125e-17, 2.3855419306031899e-17, 3.6569269303511858e-17, 5.3510795175321163e-17, 7.3048628373105907e-17, 8.0481236032162480e-17, -1.6030127634823730e-17, -8.9097997187091112e-16, -8.0735458291390920e-15], [-1.0095327636568909e-20, -9.2985167362807831e-20, -2.7069967671845106e-19, -5.7018519259901729e-19, -1.0408225215219484e-18, -1.7694757327123866e-18, -2.9104267694372437e-18, -4.7455865712165733e-18, -7.8030278607721624e-18, -1.3033458096375596e-17, -2.1316204555140386e-17, -1.9445942241399173e-17, 3.4683251023004901e-16], [3.0743144257854868e-22, 2.8520340276468446e-21, 8.4248196704022453e-21, 1.8149613270379762e-20, 3.4185673037939496e-20, 6.0589786632587583e-20, 1.0522275526619261e-19, 1.8422663780254799e-19, 3.3342844292710950e-19, 6.3997841096497351e-19, 1.3314140595637456e-18, 2.8030629002671568e-18, -8.7655634691186182e-18], [1.0758309800996224e-24, 8.6392005223733195e-24, 1.7541798496252507e-23, 1.1696508032972131e-23, -4.4729004027894559e-23, -2.3125083837663969e-22, -7.3096076167903644e-22, -1.9920673951952039e-21, -5.2107754227359354e-21, -1.3977333287902803e-20, -4.0829235139260318e-20, -1.3465005438371947e-19, 2.3092699546604107e-20]],
        [[6.6585867256343952e-4, 6.0391062909412492e-3, 1.7039733871881334e-2, 3.4210463141755437e-2, 5.8461136698023876e-2, 9.1215290865573701e-2, 1.3467632418912721e-1, 1.9232635271467170e-1, 2.6992572398206269e-1, 3.7772771884305088e-1, 5.3616564929206612e-1, 7.9425573134570399e-1, 1.3215814763957950e+0], [-1.9040818763685750e-5, -1.7362088903492573e-4, -4.9523927201324540e-4, -1.0110719093943929e-3, -1.7683001565406264e-3, -2.8444038946857054e-3, -4.3669204424495870e-3, -6.5530568987504034e-3, -9.7955523253862581e-3, -1.4871052867486280e-2, -2.3535458542986764e-2, -4.0719107502197148e-2, -8.7645409491667377e-2], [2.7217934420295566e-7, 2.4951533521906517e-6, 7.1950409050207511e-6, 1.4937261728954898e-5, 2.6736864594496588e-5, 4.4338450943579149e-5, 7.0782316354367877e-5, 1.1161288225697414e-4, 1.7769635617353708e-4, 2.9266386163339359e-4, 5.1642854887793243e-4, 1.0435158099828166e-3, 2.9055290229152226e-3], [-3.8799382870890902e-9, -3.5760090997467678e-8, -1.0424845804937299e-7, -2.2008804498292306e-7, -4.0320541869086114e-7, -6.8938685296518332e-7, -1.1444765196994858e-6, -1.8965536882555449e-6, -3.2163701154027409e-6, -5.7478235338837804e-6, -1.1310676105899868e-5, -2.6699012061459982e-5, -9.6196121908134265e-5], [5.4025459232521138e-11, 5.0073584419951627e-10, 1.4764674926366157e-9, 3.1721450752322770e-9, 5.9537426961591555e-9, 1.0507819860148453e-8, 1.8166745473873024e-8, 3.1690251692799807e-8, 5.7356743460136183e-8, 1.1145231887006595e-7, 2.4515390592713003e-7, 6.7778221453043922e-7, 3.1692035496093676e-6], [-6.3485806121303495e-13, -5.9345015131245179e-12, -1.7800435217049567e-11, -3.9246987411635389e-11, -7.6287170031409024e-11, -1.4079547863922466e-10, -2.5726193082170454e-10, -4.8007783005144206e-10, -9.4324237848299416e-10, -2.0280085667389883e-9, -5.0733901786465480e-9, -1.6702439306883324e-8, -1.0289478905864460e-7], [-1.1839815316033006e-15, -8.9660334184929719e-15, -1.4390171971713258e-14, 9.0941867277350262e-15, 1.2179139000093142e-13, 4.6094533695312416e-13, 1.3527692755923781e-12, 3.6292106755692965e-12, 9.6384498369811928e-12, 2.7051622753250237e-11, 8.7115913414987318e-11, 3.7368815195192470e-10, 3.2235014442570531e-9], [6.2082075482612180e-16, 5.6811372126942065e-15, 1.6315623501275281e-14, 3.3617121954189453e-14, 5.9373683012706327e-14, 9.6155346890925801e-14, 1.4700003288636395e-13, 2.1306915709604371e-13, 2.8174528596361537e-13, 2.6534926763237613e-13, -3.7600489621068369e-13, -6.0004372561265560e-12, -9.3552984643563810e-11], [-3.6229798426369210e-17, -3.3343465524470841e-16, -9.6912184524485071e-16, -2.0362046022914352e-15, -3.7040926142719115e-15, -6.2686274892720460e-15, -1.0249908835796096e-14, -1.6583728995457919e-14, -2.6974848904678996e-14, -4.4271880920874580e-14, -6.9370810624685105e-14, -3.6589033990648455e-14, 2.3161921333015459e-12], [1.3796715683202211e-18, 1.2741909114092744e-17, 3.7300945965709241e-17, 7.9264929596014232e-17, 1.4655670908505637e-16, 2.5368018263434172e-16, 4.2790211363369044e-16, 7.2336229693558171e-16, 1.2558878281082525e-15, 2.2960650665868900e-15, 4.5172847027534162e-15, 8.9362300365055241e-15, -3.8246756789016230e-14], [-2.9779323696985970e-20, -2.7711552769852537e-19, -8.2371704738166245e-19, -1.7915961231057771e-18, -3.4193879874723891e-18, -6.1665558282300540e-18, -1.0952388961293368e-17, -1.9746181713555926e-17, -3.7184653872222427e-17, -7.5639544789673322e-17, -1.7387103919239245e-16, -4.7180501809764678e-16, -2.8177575010518980e-16], [-3.9103792059560889e-22, -3.4692376706232916e-21, -9.3064700789376966e-21, -1.6973180020175405e-20, -2.4112471423229463e-20, -2.4876664839524719e-20, -4.5290007467091870e-21, 7.5812775943249557e-20, 3.2724791720111281e-19, 1.1087098569888398e-18, 3.8129017649000765e-18, 1.5441380467164190e-17, 5.7951625596223906e-17], [7.2494046953776773e-23, 6.6398860590246442e-22, 1.9106982054197581e-21, 3.9508164813416199e-21, 7.0199728568215485e-21, 1.1487283266173981e-20, 1.7894208795266288e-20, 2.6923225807420808e-20, 3.8897050533579639e-20, 5.0553703378431509e-20, 3.4018785707045255e-20, -2.3832741559985589e-19, -2.9213988829518567e-18], [-3.7373349275149902e-24, -3.4415188866558464e-23, -1.0014016304087211e-22, -2.1076476736495067e-22, -3.8430789512572397e-22, -6.5238135844234227e-22, -1.0709572502570653e-21, -1.7420020344516482e-21, -2.8563098312327593e-21, -4.7607424918184655e-21, -7.8297383246378508e-21, -8.2348361100723291e-21, 9.6132452980612688e-20]],
        [[6.2981677581865956e-4, 5.7105571242538750e-3, 1.6103120128675473e-2, 3.2300024554493538e-2, 5.5124178063523754e-2, 8.5856874842908871e-2, 1.2646849212811800e-1, 1.8004669985908138e-1, 2.5164409171120875e-1, 3.5012802017830999e-1, 4.9283878720435910e-1, 7.2026629989411890e-1, 1.1663996592823028e+0], [-1.7035879576967169e-5, -1.5524884589564080e-4, -4.4230788677954184e-4, -9.0133364332597007e-4, -1.5722525902220347e-3, -2.5201356193364382e-3, -3.8510302220648032e-3, -5.7432610368882310e-3, -8.5141105173884047e-3, -1.2778172191025941e-2, -1.9887264929522693e-2, -3.3490681972508909e-2, -6.8289524967381628e-2], [2.3039411370941213e-7, 2.1102541289597950e-6, 6.0742939872172461e-6, 1.2575485977650572e-5, 2.2421205864059560e-5, 3.6985303787439903e-5, 5.8631085609467357e-5, 9.1598496209613409e-5, 1.4402841874923919e-4, 2.3316691298885087e-4, 4.0123747679929009e-4, 7.7859396539529502e-4, 1.9990181459819578e-3], [-3.1145929064149996e-9, -2.8672467680010553e-8, -8.3385888646005379e-8, -1.7538489076449692e-7, -3.1961511545924203e-7, -5.4258856213708503e-7, -8.9232003309406258e-7, -1.4603822480709346e-6, -2.4356427515930483e-6, -4.2533517218811429e-6, -8.0929319499359342e-6, -1.8096340447795749e-5, -5.8504855382357440e-5], [4.1939616480593442e-11, 3.8806558787655854e-10, 1.1403339196417353e-9, 2.4369787973313963e-9, 4.5399777275177452e-9, 7.9332742065753733e-9, 1.3537936448059534e-8, 2.3216622394816296e-8, 4.1083268069209396e-8, 7.7415903614439219e-8, 1.6293366236240792e-7, 4.2000688953063715e-7, 1.7106626665068192e-6], [-5.4804802775060400e-13, -5.0992788213779271e-12, -1.5153640370582775e-11, -3.2947424589944358e-11, -6.2853280536202427e-11, -1.1328684849650798e-10, -2.0108041353884012e-10, -3.6230933972522210e-10, -6.8221986784783513e-10, -1.3914416468426097e-9, -3.2494701552270228e-9, -9.6865990617118320e-9, -4.9852197045798540e-8], [5.8045560457926979e-15, 5.4566410608011393e-14, 1.6551159834146716e-13, 3.7101865741781188e-13, 7.3701971198651449e-13, 1.3970771392496387e-12, 2.6347091562159212e-12, 5.0996556379196816e-12, 1.0447334138964323e-11, 2.3559973021850762e-11, 6.2254646432853312e-11, 2.1826477366155575e-10, 1.4385870798517789e-9], [3.1805676299361890e-17, 2.7083497327331596e-16, 6.5459697707618257e-16, 9.2678269909057112e-16, 4.7871520528737378e-16, -2.1347438392872913e-15, -1.0479276983923135e-14, -3.3952645724066479e-14, -9.9881044935042925e-14, -3.0004360823852282e-13, -1.0181625625156117e-12, -4.5640489431619054e-12, -4.0514034736897567e-11], [-6.6537050328488877e-18, -6.0843690949708012e-17, -1.7446814797189498e-16, -3.5857075665312489e-16, -6.3084305913825494e-16, -1.0155585619916413e-15, -1.5375729645347879e-15, -2.1895038618630212e-15, -2.7784323022747878e-15, -2.1661994352815569e-15, 6.2979585217259502e-15, 7.4672198511751886e-14, 1.0817656307410752e-12], [3.7562204581927107e-19, 3.4527190217093525e-18, 1.0009906482107233e-17, 2.0948118860324329e-17, 3.7890782181335633e-17, 6.3622895375048894e-17, 1.0291261955251349e-16, 1.6398397343135857e-16, 2.6065215101997896e-16, 4.1088625008276050e-16, 5.8174369220856947e-16, -1.1146909633750818e-16, -2.5864510369383514e-14], [-1.5308144476769367e-20, -1.4107866901826378e-19, -4.1121513293443515e-19, -8.6798991236882784e-19, -1.5898291319844623e-18, -2.7174151349351810e-18, -4.5083277028872455e-18, -7.4567586944666478e-18, -1.2571505845840181e-17, -2.2042238648948715e-17, -4.0503053219077885e-17, -6.7094614658343920e-17, 4.8086811113833624e-16], [4.5386639235962735e-22, 4.1967560010383425e-21, 1.2316134298075136e-20, 2.6272817848402435e-20, 4.8840577782177970e-20, 8.5158630466239793e-20, 1.4504706602414982e-19, 2.4844482446921698e-19, 4.3942703008609209e-19, 8.2670955586198414e-19, 1.7145873776558175e-18, 3.9538677026798662e-18, -2.9080089080348603e-18], [-6.9547515176805139e-24, -6.5054884813214747e-23, -1.9536012547687955e-22, -4.3131884147514674e-22, -8.3926121938368184e-22, -1.5490739809224573e-21, -2.8255805656752326e-21, -5.2478143401227054e-21, -1.0210513268706650e-20, -2.1539775646108966e-20, -5.1729526913280882e-20, -1.5070690155194294e-19, -2.8954390332674398e-19], [-1.9638367072470593e-25, -1.7684306634341339e-24, -4.9069213324251374e-24, -9.5385359915603129e-24, -1.5340363599795463e-23, -2.1257922216335617e-23, -2.4189798008035409e-23, -1.5141528912485800e-23, 3.3224069104905116e-23, 2.1308464140102674e-22, 8.9395121974595234e-22, 4.0012014348892643e-21, 1.8253892344832635e-20]],
        [[5.9747734941226091e-4, 5.4159216026548576e-3, 1.5264134684998939e-2, 3.0591733381105210e-2, 5.2147709726025265e-2, 8.1093284622080600e-2, 1.1920398359482116e-1, 1.6924159178829253e-1, 2.3568280061268103e-1, 3.2628897036246791e-1, 4.5599495723084218e-1, 6.5889800664411043e-1, 1.0438747241469247e+0], [-1.5331603214628939e-5, -1.3964482524872458e-4, -3.9742752126735878e-4, -8.0853233487673753e-4, -1.4070789869881081e-3, -2.2483002434701502e-3, -3.4214146816711334e-3, -5.0747659919442731e-3, -7.4685729904783905e-3, -1.1097870330349515e-2, -1.7025965531716971e-2, -2.8029383765543702e-2, -5.4705563755814141e-2], [1.9670807266977970e-7, 1.8003038536185907e-6, 5.1738302144561291e-6, 1.0684622571439623e-5, 1.8983233934668193e-5, 3.1166799442001372e-5, 4.9100864798672515e-5, 7.6084014355603410e-5, 1.1833571647244145e-4, 1.8873192510333884e-4, 3.1785710570442394e-4, 5.9617994243381514e-4, 1.4334516539290869e-3], [-2.5236822464818978e-9, -2.3208376057057867e-8, -6.7351083572906922e-8, -1.4118854579645655e-7, -2.5609483854787508e-7, -4.3202565981461004e-7, -7.0461626670220977e-7, -1.1406481887455179e-6, -1.8748905545944093e-6, -3.2094758566514200e-6, -5.9338494679456214e-6, -1.2680236521190068e-5, -3.7559790049451734e-5], [3.2359945052014229e-11, 2.9902431880456217e-10, 8.7628266407022926e-10, 1.8647197449043339e-9, 3.4531392269482818e-9, 5.9857770947657639e-9, 1.0107019360969913e-8, 1.7093555590477189e-8, 2.9694509846071970e-8, 5.4561102026097352e-8, 1.1074497035311949e-7, 2.6964085029678498e-7, 9.8401341647189339e-7], [-4.1299363670979808e-13, -3.8349435281558774e-12, -1.1349862857465688e-11, -2.4522092349755457e-11, -4.6373098546076252e-11, -8.2623463446303956e-11, -1.4448426723304814e-10, -2.5539639959758185e-10, -4.6910385993149829e-10, -9.2561032988268505e-10, -2.0635687596863985e-9, -5.7275067256533701e-9, -2.5763936264557402e-8], [5.0991798561497268e-15, 4.7610608397204147e-14, 1.4248295969278107e-13, 3.1311759575626700e-13, 6.0607526594958670e-13, 1.1129812107872573e-12, 2.0219238807038051e-12, 3.7479674948229134e-12, 7.3041159663861834e-12, 1.5530456910054397e-11, 3.8156243937583679e-11, 1.2108942152107858e-10, 6.7311631141698558e-10], [-5.0311957150336791e-17, -4.7525029487239476e-16, -1.4552972288470159e-15, -3.3079944412859099e-15, -6.6908155327579449e-15, -1.2963213300871740e-14, -2.5078427088424133e-14, -4.9976742840814364e-14, -1.0582532567133222e-13, -2.4778112025683608e-13, -6.8348054242514824e-13, -2.5171766738610200e-12, -1.7475426394646209e-11], [-3.1839234637124905e-19, -2.7139189198658529e-18, -6.5741208594273472e-18, -9.3496434251761211e-18, -4.9269254301540994e-18, 2.1364803667254263e-17, 1.0613709340157845e-16, 3.4707278875699418e-16, 1.0320401106965607e-15, 3.1421888364390044e-15, 1.0844299544210711e-14, 4.9592243228871240e-14, 4.4652757724289206e-13], [5.6173518460740904e-20, 5.1297514955812806e-19, 1.4667213259411609e-18, 2.9999731793033084e-18, 5.2381380801496113e-18, 8.3317738909053048e-18, 1.2359966723700819e-17, 1.6917042040178132e-17, 1.9356314924059205e-17, 6.4973155357734617e-18, -9.3789786571157800e-17, -8.2576257827619568e-16, -1.1010012885677853e-14], [-3.0968337388396374e-21, -2.8431487592517065e-20, -8.2219900879150545e-20, -1.7138022936319045e-19, -3.0820453003173302e-19, -5.1331541383067501e-19, -8.2078277662153826e-19, -1.2857362192342162e-18, -1.9878966017436536e-18, -2.9675715746764685e-18, -3.5232567916304861e-18, 6.1222954722484239e-18, 2.5203115796058377e-16], [1.2957467904497016e-22, 1.1922357196547892e-21, 3.4637224127555717e-21, 7.2737842280130954e-21, 1.3226480870074507e-20, 2.2386017836937985e-20, 3.6653806043743066e-20, 5.9556825290124635e-20, 9.7938733224341213e-20, 1.6533430021015265e-19, 2.8311810213856460e-19, 3.5988994801801489e-19, -4.9225985236219809e-18], [-4.3337026109329677e-24, -3.9957974456409238e-23, -1.1658372794423740e-22, -2.4647145961042710e-22, -4.5248744412662780e-22, -7.7598317878762546e-22, -1.2935975884311769e-21, -2.1551711103040184e-21, -3.6764079816097308e-21, -6.5860298789269941e-21, -1.2704384843415212e-20, -2.5380350624268707e-20, 6.1499794614625509e-20], [1.0755370719646887e-25, 9.9523888652587489e-25, 2.9249933571236894e-24, 6.2535120639719936e-24, 1.1660372977309511e-23, 2.0410494333532338e-23, 3.4935351602877129e-23, 6.0211165544445121e-23, 1.0736473005692279e-22, 2.0437314246342151e-22, 4.3280705428142254e-22, 1.0581989100049014e-21, 7.1667218225308641e-22]],
        [[5.6829773267493189e-4, 5.1502062750156441e-3, 1.4508268534987247e-2, 2.9055115558181517e-2, 4.9476305600348951e-2, 7.6830673610040536e-2, 1.1272899159684011e-1, 1.5966043196701736e-1, 2.2162636192334535e-1, 3.0549074950993188e-1, 4.2427977759219373e-1, 6.0717344246676463e-1, 9.4467020292441753e-1], [-1.3870860425708158e-5, -1.2628051022249524e-4, -3.5904749625143149e-4, -7.2935997709982892e-4, -1.2666320781598148e-3, -2.0181917048332149e-3, -3.0598838655311259e-3, -4.5165542465263014e-3, -6.6044609691919823e-3, -9.7285153942359208e-3, -1.4740653789829815e-2, -2.3803040237068783e-2, -4.4807349733732911e-2], [1.6927808372687197e-7, 1.5481672858864843e-6, 4.4428134070314700e-6, 9.1544256780957044e-6, 1.6213379776231329e-5, 2.6506967549061264e-5, 4.1528296696487127e-5, 6.3883251835397057e-5, 9.8406365372531322e-5, 1.5490481932550569e-4, 2.5606546607137268e-4, 4.6657551634176057e-4, 1.0626448623966293e-3], [-2.0658351209749821e-9, -1.8980036577102631e-8, -5.4974573224358480e-8, -1.1489944520564224e-7, -2.0753642222308814e-7, -3.4814120524960946e-7, -5.6361314685238164e-7, -9.0357603428269184e-7, -1.4662465725395321e-6, -2.4665016711609165e-6, -4.4481922533214652e-6, -9.1455518179743341e-6, -2.5201462145668681e-5], [2.5209355592354235e-11, 2.3267387474490762e-10, 6.8020149824730308e-10, 1.4420404589301215e-9, 2.6563714000686965e-9, 4.5722059244694345e-9, 7.6488230223739052e-9, 1.2779700779972664e-8, 2.1845962431241430e-8, 3.9271780680184646e-8, 7.7268312180250304e-8, 1.7926116712977440e-7, 5.9766134671039932e-7], [-3.0743644201201687e-13, -2.8505542308868935e-12, -8.4110759578872848e-12, -1.8087802885360864e-11, -3.3981774163027151e-11, -6.0017234465432447e-11, -1.0375473124810094e-10, -1.8067539883454783e-10, -3.2537374362050922e-10, -6.2510580163712934e-10, -1.3419025514465234e-9, -3.5131191696223910e-9, -1.4172418818835221e-8], [3.7310934265453512e-15, 3.4756450050307057e-14, 1.0352934232993729e-13, 2.2589153427675373e-13, 4.3296055561760079e-13, 7.8494284635318744e-13, 1.4028869166787290e-12, 2.5473314755861024e-12, 4.8352505636448331e-12, 9.9327968507653938e-12, 2.3275552681406225e-11, 6.8795270958041309e-11, 3.3594394873765000e-10], [-4.3843065038902843e-17, -4.1062031123525285e-16, -1.2364906014061714e-15, -2.7429741368183153e-15, -5.3775948886976450e-15, -1.0038218965526455e-14, -1.8609944851154018e-14, -3.5358883888761397e-14, -7.0990514054054937e-14, -1.5645202648262942e-13, -4.0139880682470797e-13, -1.3428257920539981e-12, -7.9527810760139078e-12], [4.1794249525199364e-19, 3.9611389563967262e-18, 1.2209984163856069e-17, 2.8024778171379846e-17, 5.7405055448905282e-17, 1.1295660771704272e-16, 2.2256957600222350e-16, 4.5312402735944121e-16, 9.8358741781642569e-16, 2.3704950762491376e-15, 6.7638373784309135e-15, 2.5911789231643319e-14, 1.8753757896211564e-13], [1.8915197472519985e-21, 1.5519952404889265e-20, 3.3611194140060874e-20, 3.1388828722413509e-20, -4.9782932865611673e-20, -3.4932282312570084e-19, -1.2136962000739221e-18, -3.5677369980277083e-18, -1.0149290549862809e-17, -3.0364628307692682e-17, -1.0458618758490172e-16, -4.8221280405195452e-16, -4.3785005770140819e-15], [-3.8480969871892351e-22, -3.5069008384441777e-21, -9.9831332986815912e-21, -2.0266820258039514e-20, -3.4960843740566362e-20, -5.4503666166926058e-20, -7.7981666804651516e-20, -9.8713072473518607e-20, -8.6746719621706141e-20, 9.0590273111902833e-20, 1.1214409241844017e-18, 8.0424523921419595e-18, 9.9912446247686783e-17], [2.0908423052090315e-23, 1.9171846059087682e-22, 5.5299436757725929e-22, 1.1479048745390095e-21, 2.0517663136854549e-21, 3.3871087290015917e-21, 5.3456352388606340e-21, 8.2038904290338833e-21, 1.2230603978331514e-20, 1.6795419065470693e-20, 1.3258693794513345e-20, -8.9769408811249935e-20, -2.1720938103374463e-18], [-8.7966765512990700e-25, -8.0831840209345043e-24, -2.3419425030117581e-23, -4.8969941046482292e-23, -8.8502329834037433e-23, -1.4853766980571273e-22, -2.4043551214415063e-22, -3.8448223682295747e-22, -6.1757131116789307e-22, -1.0025615483814030e-21, -1.5742534712285821e-21, -1.1073650170785982e-21, 4.2709895463507331e-20], [3.0934262114844494e-26, 2.8469434697262239e-25, 8.2749966100708347e-25, 1.7391486995393036e-24, 3.1664781086186656e-24, 5.3701127437099192e-24, 8.8214359738634180e-24, 1.4413232352485472e-23, 2.3946340290764572e-23, 4.1303362967458238e-23, 7.4842787107834505e-23, 1.2701781590482375e-22, -6.6512765256309453e-22]],
        [[5.4183628561544893e-4, 4.9093513428486052e-3, 1.3823749705464343e-2, 2.7665524708959374e-2, 4.7065340235949965e-2, 7.2993938217713814e-2, 1.0692140453480202e-1, 1.5110633890671526e-1, 2.0915286583952644e-1, 2.8718619287895643e-1, 3.9669156697582483e-1, 5.6298366524453540e-1, 8.6270114657489092e-1], [-1.2609376551928956e-5, -1.1474698314287147e-4, -3.2597071666511225e-4, -6.6127321206556881e-4, -1.1462124787373455e-3, -1.8216881238866883e-3, -2.7527770880993831e-3, -4.0456384057691476e-3, -5.8821044944770229e-3, -8.5978598175046639e-3, -1.2886486139673944e-2, -2.0465477935973413e-2, -3.7372325162340413e-2], [1.4671993769361188e-7, 1.3409989238174675e-6, 3.8432736093036410e-6, 7.9030174218148644e-6, 1.3957224141049439e-5, 2.2731665117140347e-5, 3.5436222969796212e-5, 5.4157852418468909e-5, 8.2712594143080579e-5, 1.2870255078309093e-4, 2.0930810443322263e-4, 3.7197862025248268e-4, 8.0948695242077376e-4], [-1.7072000712913652e-9, -1.5671672596924758e-8, -4.5313101583557522e-8, -9.4450600011155522e-8, -1.6995453207141000e-7, -2.8365356969670112e-7, -4.5616671647622810e-7, -7.2499598457271442e-7, -1.1630820508859166e-6, -1.9265654384387755e-6, -3.3996750500976545e-6, -6.7610463599630121e-6, -1.7533533882458139e-5], [1.9864454989137636e-11, 1.8314676162726175e-10, 5.3424848601289303e-10, 1.1287911726866294e-9, 2.0694915225819218e-9, 3.5395054945055330e-9, 5.8721515053551270e-9, 9.7052659193193600e-9, 1.6354864368642252e-8, 2.8838887105174990e-8, 5.5218825423988254e-8, 1.2288773831505956e-7, 3.7977653647752109e-7], [-2.3111983775407236e-13, -2.1401877470311803e-12, -6.2984304823320282e-12, -1.3489417541123033e-11, -2.5198043144610881e-11, -4.4164273991746687e-11, -7.5587035332221761e-11, -1.2991467585990914e-10, -2.2996687089346104e-10, -4.3167608238399943e-10, -8.9686045691731989e-10, -2.2335437748101701e-9, -8.2258637626926165e-9], [2.6873708529343356e-15, 2.4994177723185364e-14, 7.4210388742907159e-14, 1.6111252600702451e-13, 3.0665042542387705e-13, 5.5079973296014469e-13, 9.7255669270656568e-13, 1.7384100849783927e-12, 3.2326153526418670e-12, 6.4600474857768884e-12, 1.4564255205571644e-11, 4.0591220885243697e-11, 1.7815997277245062e-10], [-3.1107791557827999e-17, -2.9061500362031471e-16, -8.7070241786109680e-16, -1.9167040048366627e-15, -3.7184245652588299e-15, -6.8474729701933106e-15, -1.2479329643304027e-14, -2.3209254014748560e-14, -4.5359337131944433e-14, -9.6547237852587623e-14, -2.3630052016121563e-13, -7.3729981256559275e-13, -3.8578100319454392e-12], [3.5004730361700746e-19, 3.2872196209368684e-18, 9.9522394918119725e-18, 2.2259125642409689e-17, 4.4126916443206216e-17, 8.3552796278641378e-17, 1.5766067915836998e-16, 3.0606498182434416e-16, 6.3061552968842552e-16, 1.4336942246159287e-15, 3.8186113423891000e-15, 1.3364374987220872e-14, 8.3471498327376819e-14], [-3.3100111198116049e-21, -3.1429758469664290e-20, -9.7243813163052266e-20, -2.2446907548802563e-19, -4.6335967518530894e-19, -9.2086293783767321e-19, -1.8371389214179789e-18, -3.7977965446270242e-18, -8.3992706595169359e-18, -2.0708711042062451e-17, -6.0742955447567188e-17, -2.4046903103419025e-16, -1.8019601842740635e-15], [-4.3527531404512936e-24, -2.5307203386109826e-23, 1.6536611054179510e-23, 3.4371623629693691e-22, 1.4731729113849838e-21, 4.6162856599923619e-21, 1.2757112189117993e-20, 3.3835931007435952e-20, 9.1399790959971728e-20, 2.6682334928857723e-19, 9.1252760802454338e-19, 4.2276988327754626e-18, 3.8667909613258679e-17], [2.1739983951725688e-24, 1.9750053693924268e-23, 5.5837881472656478e-23, 1.1200609388525045e-22, 1.8935960876843216e-22, 2.8495459931317655e-22, 3.8007403193556777e-22, 3.9993170677439112e-22, 6.1036914825232833e-23, -1.8034207221181840e-21, -1.1025375138451940e-20, -6.9400734360209913e-20, -8.1813599520662658e-19], [-1.1816579843494027e-25, -1.0820481216558427e-24, -3.1122203964255832e-24, -6.4304937123984216e-24, -1.1413561122077288e-23, -1.8644588260948843e-23, -2.8947999996861743e-23, -4.3213872061654987e-23, -6.0971793568645933e-23, -7.1608993821843907e-23, 6.2318560008394326e-24, 9.1646520517515404e-22, 1.6789909516659778e-20], [4.9448850011222136e-27, 4.5385168203231620e-26, 1.3117241113943252e-25, 2.7322047427889733e-25, 4.9103168257151401e-25, 8.1770588595645568e-25, 1.3091807393150814e-24, 2.0604135710027298e-24, 3.2271821808271859e-24, 4.9972185882423995e-24, 6.8765534771866247e-24, -2.4202827313697303e-24, -3.2348994064669043e-22]],
        [[5.1773001429936664e-4, 4.6900229895897935e-3, 1.3200929200210050e-2, 2.6402817320688298e-2, 4.4878488429008399e-2, 6.9522274541810616e-2, 1.0168306237526012e-1, 1.4342251695606104e-1, 1.9800908622748523e-1, 2.7095202058802073e-1, 3.7247364669825318e-1, 5.2479317226938395e-1, 7.9383164359279870e-1], [-1.1512489439440625e-5, -1.0472447036563919e-4, -2.9726322464756483e-4, -6.0229489429726920e-4, -1.0421854692929858e-3, -1.6525501949995638e-3, -2.4896932850833567e-3, -3.6447193252721974e-3, -5.2721073085183276e-3, -7.6534760060474297e-3, -1.1361436268015411e-2, -1.7783836472569644e-2, -3.1645896554132880e-2], [1.2799857947377241e-7, 1.1692069197035252e-6, 3.3469395664166378e-6, 6.8697051224624156e-6, 1.2101015293887707e-5, 1.9640627109544725e-5, 3.0479868001047975e-5, 4.6310646363881828e-5, 7.0186464501130517e-5, 1.0809237499099320e-4, 1.7327700213309464e-4, 3.0132331706540367e-4, 6.3077780675941154e-4], [-1.4231184022593620e-9, -1.3053728057048466e-8, -3.7683786664895963e-8, -7.8355049580231776e-8, -1.4050720227190510e-7, -2.3342965158300720e-7, -3.7314729452603223e-7, -5.8843375483419852e-7, -9.3437771954898693e-7, -1.5266215095758698e-6, -2.6427044710526438e-6, -5.1055203237054342e-6, -1.2572898038559420e-5], [1.5822555580141486e-11, 1.4573956134903759e-10, 4.2428816720862102e-10, 8.9370792394556361e-10, 1.6314549913608267e-9, 2.7743192741544847e-9, 4.5682227513121159e-9, 7.4767711730454691e-9, 1.2439169270108913e-8, 2.1560931157977186e-8, 4.0304739277809974e-8, 8.6506183180541306e-8, 2.5060762925447318e-7], [-1.7591746746548111e-13, -1.6271108214408912e-12, -4.7770981065252978e-12, -1.0193450087572906e-11, -1.8942998918257231e-11, -3.2972674255648522e-11, -5.5925745942754908e-11, -9.5001046937884317e-11, -1.6559924480290735e-10, -3.0451032543245190e-10, -6.1469875247297602e-10, -1.4657278209198495e-9, -4.9951965308688517e-9], [1.9557392668801735e-15, 1.8164646660559261e-14, 5.3782193683940417e-14, 1.1625705742522074e-13, 2.1993621669965853e-13, 3.9185781007075796e-13, 6.8462924770625576e-13, 1.2070483035341490e-12, 2.2045008518302348e-12, 4.3005555420940307e-12, 9.3747490690253374e-12, 2.4834394837044109e-11, 9.9565227012975827e-11], [-2.1730709046844750e-17, -2.0267609625901423e-16, -6.0518487334887371e-16, -1.3252762239289172e-15, -2.5524150669726249e-15, -4.6551121285275666e-15, -8.3781785200686725e-15, -1.5331905675847823e-14, -2.9340175392091681e-14, -6.0725681519795026e-14, -1.4295700974646402e-13, -4.2074872071524435e-13, -1.9844883102479883e-12], [2.4055240447355830e-19, 2.2531506929427561e-18, 6.7861966712694822e-18, 1.5058885163821035e-17, 2.9535496080587350e-17, 5.5160884072399158e-17, 1.0231006433066435e-16, 1.9441194303149536e-16, 3.8998491670069901e-16, 8.5667885302542344e-16, 2.1786817422947794e-15, 7.1260999361146014e-15, 3.9548889298224267e-14], [-2.6032920685878146e-21, -2.4503929517587201e-20, -7.4536016222245065e-20, -1.6790129726972986e-19, -3.3609986884523057e-19, -6.4438420748143152e-19, -1.2349294884416291e-18, -2.4431030964094279e-18, -5.1498268068585874e-18, -1.2032758304929990e-17, -3.3117311152255495e-17, -1.2053884995111547e-16, -7.8783162872751164e-16], [2.4694752659458317e-23, 2.3469360395212914e-22, 7.2751074599992015e-22, 1.6845124567514123e-21, 3.4932359805633673e-21, 6.9873030641810971e-21, 1.4062592675044856e-20, 2.9409585804639033e-20, 6.6025281216462016e-20, 1.6591673492059478e-19, 4.9833972341633407e-19, 2.0298330833015171e-18, 1.5673753342874890e-17], [-4.9000128583957611e-26, -5.5568491573108716e-25, -2.2567157612441988e-24, -6.9542871827942168e-24, -1.8771105941969811e-23, -4.7250720508870276e-23, -1.1573064892251495e-22, -2.8616762081002638e-22, -7.4271055501226795e-22, -2.1256502963157704e-21, -7.2331376323192230e-21, -3.3702511696401953e-20, -3.1075141965093781e-19], [-1.0158574575804766e-26, -9.1794510293671115e-26, -2.5645839150791242e-25, -5.0351854775345553e-25, -8.1942684236840283e-25, -1.1456944161303068e-24, -1.2812981407104034e-24, -5.6183890769522802e-25, 3.3233462409786828e-24, 1.9476814709587701e-23, 9.2378349574110429e-23, 5.3689589512421663e-22, 6.1097553156590872e-21], [5.6704109847766432e-28, 5.1842195449392376e-27, 1.4859825697155245e-26, 3.0527142095016410e-26, 5.3697043391498447e-26, 8.6483525379473472e-26, 1.3116581851615317e-25, 1.8747070927909537e-25, 2.3911377017542649e-25, 1.8314222949214768e-25, -6.2187234952669733e-25, -7.5747423718782884e-24, -1.1788152348375489e-22]],
        [[4.9567781706371176e-4, 4.4894581056014381e-3, 1.2631823230778438e-2, 2.5250369643664707e-2, 4.2885881701963167e-2, 6.6365930437575197e-2, 9.6934159639931837e-2, 1.3648254937037667e-1, 1.8799309033812575e-1, 2.5645565186093848e-1, 3.5104373621171493e-1, 4.9145733803406487e-1, 7.3515189399317305e-1], [-1.0552758544542471e-5, -9.5960081129943958e-5, -2.7218795595588885e-4, -5.5086977515039618e-4, -9.5170498025498481e-4, -1.5059221915448966e-3, -2.2626024322492682e-3, -3.3005801449771537e-3, -4.7523165941271499e-3, -6.8565793470059881e-3, -1.0091968321972096e-2, -1.5596820905471752e-2, -2.7141841507181440e-2], [1.1233174962152128e-7, 1.0255510745564320e-6, 2.9325253370049413e-6, 6.0089716190326481e-6, 1.0559913115088310e-5, 1.7085586170585700e-5, 2.6406427746840463e-5, 3.9909238732857690e-5, 6.0067401854962127e-5, 9.1658499221679519e-5, 1.4506429553715174e-4, 2.4748925642724062e-4, 5.0103901403275436e-4], [-1.1957462944216292e-9, -1.0960338822120546e-8, -3.1594729421425276e-8, -6.5546779682727210e-8, -1.1717051702852302e-7, -1.9384617306159244e-7, -3.0818468768915076e-7, -4.8256587053550566e-7, -7.5922819589683698e-7, -1.2252874252549619e-6, -2.0851878552210053e-6, -3.9271420926447755e-6, -9.2491916201027190e-6], [1.2728450535845666e-11, 1.1713606785957245e-10, 3.4039837907668333e-10, 7.1499423933290350e-10, 1.3000987020535934e-9, 2.1993004239029010e-9, 3.5967681082487521e-9, 5.8349849903373808e-9, 9.5963436400322850e-9, 1.6379596348261535e-8, 2.9972973267406213e-8, 6.2315612522398842e-8, 1.7074028474989296e-7], [-1.3549140057175681e-13, -1.2518635752986665e-12, -3.6674148082690768e-12, -7.7992608202203571e-12, -1.4425604963457027e-11, -2.4952360324540158e-11, -4.1977211891801042e-11, -7.0554167979030568e-11, -1.2129393099465654e-10, -2.1896175120576706e-10, -4.3083833594081629e-10, -9.8881950936913816e-10, -3.1518690414082106e-9], [1.4422643916114854e-15, 1.3378898797666005e-14, 3.9512060801810331e-14, 8.5074925795006230e-14, 1.6006233836396457e-13, 2.8309769651948632e-13, 4.8990583839884508e-13, 8.5310749025624153e-13, 1.5331010929913819e-12, 2.9270629842348933e-12, 6.1929547637410221e-12, 1.5690491196782152e-11, 5.8183516709325373e-11], [-1.5351543148705176e-17, -1.4297438675672038e-16, -4.2567174455933721e-16, -9.2795442548278294e-16, -1.7759186023617663e-15, -3.2117519825033255e-15, -5.7173536340639705e-15, -1.0315039127114828e-14, -1.9377211005982543e-14, -3.9127969580301234e-14, -8.9017512129818618e-14, -2.4897303809167521e-13, -1.0740635226233950e-12], [1.6333045156015386e-19, 1.5272443320879181e-18, 4.5839624268609172e-18, 1.0117782392759913e-17, 1.9697286710698178e-17, 3.6426339510159082e-17, 6.6706094490003223e-17, 1.2469440865025014e-16, 2.4487333144469991e-16, 5.2298820111569804e-16, 1.2794396084282327e-15, 3.9504756584214701e-15, 1.9826778651831631e-14], [-1.7327495060676546e-21, -1.6268439419222170e-20, -4.9233383755431331e-20, -1.1004994250600662e-19, -2.1799763908335915e-19, -4.1236678724441672e-19, -7.7709144385927278e-19, -1.5055732172583887e-18, -3.0917651092233795e-18, -6.9860776509294327e-18, -1.8382452007653944e-17, -6.2670645437873926e-17, -3.6596927864574551e-16], [1.8078031258939449e-23, 1.7051227342929720e-22, 5.2081842769867089e-22, 1.1806411741265750e-21, 2.3838249784051116e-21, 4.6213625794517471e-21, 8.9798788751021201e-21, 1.8067566788078575e-20, 3.8868069630757892e-20, 9.3059631213761831e-20, 2.6369178000791661e-19, 9.9347644796273586e-19, 6.7536206891505071e-18], [-1.7193064556579511e-25, -1.6347738546115237e-24, -5.0730943151161679e-24, -1.1769844458852399e-23, -2.4486899788235878e-23, -4.9222540210704047e-23, -9.9775273907787529e-23, -2.1073441718126086e-22, -4.7937338110068120e-22, -1.2252923812695555e-21, -3.7594464200144162e-21, -1.5708185337382005e-20, -1.2454452330736053e-19], [7.9808225779473789e-28, 8.0298221976456186e-27, 2.7551410849103024e-26, 7.2497232831933116e-26, 1.7261882501649938e-25, 3.9626230032684412e-25, 9.0992051398596356e-25, 2.1557009249524886e-24, 5.4529016108661863e-24, 1.5421852043836275e-23, 5.2447641770893713e-23, 2.4633441959552743e-22, 2.2923544935734681e-21], [3.8421972231106317e-29, 3.4288684453544015e-28, 9.3385635696100956e-28, 1.7489257570778016e-27, 2.5928308406407974e-27, 2.8956266470287554e-27, 1.0065583414582532e-27, -8.0908391799842760e-27, -4.1050631091475981e-26, -1.6187949804165059e-25, -6.7970881373712613e-25, -3.7704549090347923e-24, -4.1979398506737410e-23]],
        [[4.7542783099037147e-4, 4.3053471623174007e-3, 1.2109768802835222e-2, 2.4194340981445164e-2, 4.1062734537061248e-2, 6.3483803276146115e-2, 9.2609146156838047e-2, 1.3018337938239075e-1, 1.7894187431301183e-1, 2.4343214028932198e-1, 3.3194643057147042e-1, 4.6210542979718665e-1, 6.8455496012006239e-1], [-9.7082326440642215e-6, -8.8251703649850342e-5, -2.5015697061384812e-4, -5.0576094465061222e-4, -8.7251688321266660e-4, -1.3779795807057258e-3, -2.0652254629179653e-3, -3.0029827524622715e-3, -4.3057823609816774e-3, -6.1779796440038769e-3, -9.0239966280070614e-3, -1.3789840712562911e-2, -2.3535393162223721e-2], [9.9121017877440050e-8, 9.0449885960048254e-7, 2.5838028357419526e-6, 5.2862389045179715e-6, 9.2697882893577845e-6, 1.4955213982358198e-5, 2.3027726685906018e-5, 3.4635394526749362e-5, 5.1803865951102959e-5, 7.8394398611187060e-5, 1.2265912153511013e-4, 2.0575359497380984e-4, 4.0458017512285244e-4], [-1.0120252102048325e-9, -9.2702820790610137e-9, -2.6687391823499674e-8, -5.5252035657563617e-8, -9.8484025420930022e-8, -1.6230895459634086e-7, -2.5676431252015194e-7, -3.9947300820929326e-7, -6.2326432268402548e-7, -9.9477209158278043e-7, -1.6672501899975543e-6, -3.0699804819268470e-6, -6.9548495300866813e-6], [1.0332773445834255e-11, 9.5011871520436226e-11, 2.7564675962603412e-10, 5.7749706099667331e-10, 1.0463133482304533e-9, 1.7615392643137195e-9, 2.8629796085148296e-9, 4.6073874976050269e-9, 7.4986375537622539e-9, 1.2622987468267503e-8, 2.2662180798507104e-8, 4.5806150507955380e-8, 1.1955586279360932e-7], [-1.0549757032254866e-13, -9.7378430623673974e-13, -2.8470797094001566e-12, -6.0360280506297781e-12, -1.1116234947769971e-11, -1.9117986646552953e-11, -3.1922862583894077e-11, -5.3140057625999308e-11, -9.0217843478653959e-11, -1.6017719937243265e-10, -3.0803680724428155e-10, -6.8345821602423956e-10, -2.0551996245569922e-9], [1.0771290312090478e-15, 9.9803873408964204e-15, 2.9406686825132089e-14, 6.3088829199882936e-14, 1.1810096107810247e-13, 2.0748741592384971e-13, 3.5594689265802521e-13, 6.1289930759350506e-13, 1.0854313856527783e-12, 2.0325400992772890e-12, 4.1870045807147956e-12, 1.0197649441401302e-11, 3.5329468942131403e-11], [-1.0997411160329886e-17, -1.0228913987665396e-16, -3.0373173007709441e-16, -6.5940376002764340e-16, -1.2547206725259416e-15, -2.2518501357750086e-15, -3.9688705221123799e-15, -7.0689488538873761e-15, -1.3059037488592739e-14, -2.5791504066848724e-14, -5.6911971353452734e-14, -1.5215554632121048e-13, -6.0732338611249823e-13], [1.1227755291514135e-19, 1.0483151251029808e-18, 3.1370056945387003e-18, 6.8918008741696612e-18, 1.3329830889105877e-17, 2.4438416172461881e-17, 4.4252374597640385e-17, 8.1528723631958797e-17, 1.5711303843043020e-16, 3.2727177489601007e-16, 7.7357073363867422e-16, 2.2702479580431794e-15, 1.0440034424350547e-14], [-1.1459178458639310e-21, -1.0740287705485166e-20, -3.2389879703389172e-20, -7.2010056547629620e-20, -1.4157747258666826e-19, -2.6516318798992333e-19, -4.9331986123788699e-19, -9.4016665588000626e-19, -1.8900231523389453e-18, -4.1524875091680808e-18, -1.0514202438455884e-17, -3.3872568448244672e-17, -1.7946499865582042e-16], [1.1671548112516427e-23, 1.0981977986405958e-22, 3.3380634518936156e-22, 7.5113273405711389e-22, 1.5014654270778275e-21, 2.8734572060662398e-21, 5.4938465176922004e-21, 1.0833233621956438e-20, 2.2723585968708758e-20, 5.2667932041465122e-20, 1.4287552705180312e-19, 5.0533219891536565e-19, 3.0849077131929316e-18], [-1.1751903682303545e-25, -1.1104965941353989e-24, -3.4046554304655853e-24, -7.7621974729809019e-24, -1.5795314489065195e-23, -3.0930825829697950e-23, -6.0860711247221387e-23, -1.2434089835179598e-22, -2.7246851825897482e-22, -6.6688517515727580e-22, -1.9397146551379717e-21, -7.5357729343627388e-21, -5.3021560017438384e-20], [1.1130371752670204e-27, 1.0588436196522455e-26, 3.2892886645967648e-26, 7.6455624159917122e-26, 1.5955154133673963e-25, 3.2222911305204006e-25, 6.5760746679717159e-25, 1.4019734615200974e-24, 3.2289934054655734e-24, 8.3857335301567103e-24, 2.6240824669564480e-23, 1.1221614308962274e-22, 9.1096888488545332e-22], [-7.3450565953342005e-30, -7.1060872078346322e-29, -2.3210471285893404e-28, -5.7748844302741748e-28, -1.3027615245668642e-27, -2.8567329870409837e-27, -6.3307778060211671e-27, -1.4633736048698622e-26, -3.6486450935489754e-26, -1.0270399879181664e-25, -3.5056572928127651e-25, -1.6630787015808227e-24, -1.5630995523194960e-23]],
        [[4.5676776051860283e-4, 4.1357447921869384e-3, 1.1629161383437110e-2, 2.3223114576027082e-2, 3.9388307033693103e-2, 6.0841638191528185e-2, 8.8653679497517910e-2, 1.2444015151022730e-1, 1.7072241125326945e-1, 2.3166780811733002e-1, 3.1482041808148679e-1, 4.3606327818955710e-1, 6.4047759884809994e-1], [-8.9611829193470320e-6, -8.1436243254733844e-5, -2.3069665881656577e-4, -4.6597472164531265e-4, -8.0281716499195875e-4, -1.2656769618382086e-3, -1.8925952897267883e-3, -2.7438969855199832e-3, -3.9193570051251279e-3, -5.5953674508582587e-3, -8.1170227952681263e-3, -1.2279670842869776e-2, -2.0602916124523943e-2], [8.7903313516212220e-8, 8.0177356784287609e-7, 2.2882539262410869e-6, 4.6749207670100318e-6, 8.1815575350047641e-6, 1.3164817872620292e-5, 2.0201738670041926e-5, 3.0251372148645090e-5, 4.4989287641977122e-5, 6.7571185579313302e-5, 1.0464070192835010e-4, 1.7289958080757026e-4, 3.3137782929273126e-4], [-8.6227371949956556e-10, -7.8937930875371611e-9, -2.2696930496170801e-8, -4.6901437271627282e-8, -8.3378740037311756e-8, -1.3693259405181195e-7, -2.1563524304468069e-7, -3.3352036234943218e-7, -5.1642042300624084e-7, -8.1600809251981478e-7, -1.3489769310835832e-6, -2.4344516579926258e-6, -5.3298894720412581e-6], [8.4583383418802508e-12, 7.7717664671752262e-11, 2.2512827264179469e-10, 4.7054162563948071e-10, 8.4971770452271758e-10, 1.4242912807169096e-9, 2.3017106987323375e-9, 3.6770507970903134e-9, 5.9278567679261911e-9, 9.8543365963079490e-9, 1.7390353148491713e-8, 3.4277439230592236e-8, 8.5726078419861965e-8], [-8.2970738360545539e-14, -7.6516261669055021e-13, -2.2330217262191041e-12, -4.7207384972302522e-12, -8.6595236876851361e-12, -1.4814629478800932e-11, -2.4568674613598169e-11, -4.0539361449683788e-11, -6.8044337894785983e-11, -1.1900365989002388e-10, -2.2418795683879032e-10, -4.8263141084164379e-10, -1.3788204336669702e-9], [8.1388835252848595e-16, 7.5333426677205689e-15, 2.2149087351472526e-14, 4.7361104013825548e-14, 8.8249717131524143e-14, 1.5409294453574136e-13, 2.6224831363784724e-13, 4.4694508239140809e-13, 7.8106337041604457e-13, 1.4371206620569621e-12, 2.8901218189200995e-12, 6.7955215132489390e-12, 2.2176982881052264e-11], [-7.9837050705662060e-18, -7.4168838638938914e-17, -2.1969415800974082e-16, -4.7515301387552197e-16, -8.9935768786660817e-16, -1.6027823232351049e-15, -2.7992618792752423e-15, -4.9275528937348210e-15, -8.9656224148825119e-15, -1.7355057897164693e-14, -3.7258036065172141e-14, -9.5681937542665868e-14, -3.5669513928481351e-13], [7.8314504103342750e-20, 7.3021935771313002e-19, 2.1791110802399381e-18, 4.7669814779020838e-18, 9.1653707089848339e-18, 1.6671127134693121e-17, 2.9879489864853855e-17, 5.4325965421753611e-17, 1.0291385579393883e-16, 2.0958409878719749e-16, 4.8031193621574035e-16, 1.3472149634075836e-15, 5.7370919947528908e-15], [-7.6818420123224772e-22, -7.1890419587257657e-21, -2.1613582051185873e-20, -4.7823457876168375e-20, -9.3402053518113445e-20, -1.7339862604208552e-19, -3.1892948972334855e-19, -5.9893139891692370e-19, -1.1813057037484190e-18, -2.5309705414599831e-18, -6.1919089001824962e-18, -1.8968920001459522e-17, -9.2275400334820098e-17], [7.5333996910091953e-24, 7.0760995529215545e-23, 2.1433087594231224e-22, 4.7968566310032246e-22, 9.5167908085574008e-22, 1.8032865652771985e-21, 3.4038145271668083e-21, 6.6024887411463408e-21, 1.3558831813337922e-20, 3.0563050082814876e-20, 7.9820460011894486e-20, 2.6708070671899545e-19, 1.4841506814228860e-18], [-7.3778206035906279e-26, -6.9557969850893995e-25, -2.1228003539560959e-24, -4.8060685471805420e-24, -9.6873376830812002e-24, -1.8738420166528468e-23, -3.6304277145453180e-23, -7.2749195568532783e-23, -1.5557325504942036e-22, -3.6898777869757115e-22, -1.0288468131919799e-21, -3.7602597437216969e-21, -2.3870545386409459e-20], [7.1727529977267472e-28, 6.7888172125160566e-27, 2.0885937673839024e-26, 4.7868643200886154e-26, 9.8109616532601954e-26, 1.9390753252966125e-25, 3.8596597509748445e-25, 7.9970306584957691e-25, 1.7822129262649600e-24, 4.4504917762140754e-24, 1.3254556779382093e-23, 5.2929636009372581e-23, 3.8390220948745381e-22], [-6.8273666262829115e-30, -6.4561573861447317e-29, -2.0001145647822386e-28, -4.6509689423624172e-28, -9.7262323573187072e-28, -1.9722931310713190e-27, -4.0503499706497693e-27, -8.7087426576023914e-27, -2.0290911162472318e-26, -5.3481557583156201e-26, -1.7042415763096701e-25, -7.4436396622345529e-25, -6.1714975483150122e-24]],
        [[4.3951739977552517e-4, 3.9790007233512650e-3, 1.1185252713177708e-2, 2.2326868097806294e-2, 3.7845111687174979e-2, 5.8410658770462045e-2, 8.5022327321966570e-2, 1.1918236236688788e-1, 1.6322506146078887e-1, 2.2098841438299179e-1, 2.9937536571310757e-1, 4.1280075535940917e-1, 6.0173544014955717e-1], [-8.2971644597117767e-6, -7.5380920122761252e-5, -2.1342206156441472e-4, -4.3070543272045193e-4, -7.4114821605882046e-4, -1.1665650604963194e-3, -1.7407410541951831e-3, -2.5169528805941700e-3, -3.5827157156794611e-3, -5.0914554537889789e-3, -7.3402358196620560e-3, -1.1004684632980448e-2, -1.8186334083437471e-2], [7.8316510457448177e-8, 7.1403393887397782e-7, 2.0361174454619061e-6, 4.1543482265909269e-6, 7.2572209947168935e-6, 1.1649192707435259e-5, 1.7819903978196075e-5, 2.6577136403913972e-5, 3.9319488638879935e-5, 5.8652211950327795e-5, 8.9985797194615550e-5, 1.4668466844968601e-4, 2.7482405499680930e-4], [-7.3922553180741021e-10, -6.7635744566788566e-9, -1.9425237584718753e-8, -4.0070563026679682e-8, -7.1061705911084216e-8, -1.1632758028692181e-7, -1.8242172035092272e-7, -2.8063464551816254e-7, -4.3152242865804585e-7, -6.7565787384088748e-7, -1.1031585218355389e-6, -1.9552029590826873e-6, -4.1530228609191842e-6], [6.9775119406067671e-12, 6.4066897859427303e-11, 1.8532322683810084e-10, 3.8649865963635068e-10, 6.9582641214350000e-10, 1.1616346535753512e-9, 1.8674446335884201e-9, 2.9632915701205848e-9, 4.7358603297715997e-9, 7.7833989085143668e-9, 1.3523897795223683e-8, 2.6061473578422678e-8, 6.2758694406717691e-8], [-6.5860377882167948e-14, -6.0686363789709293e-13, -1.7680452166794730e-12, -3.7279539534851398e-12, -6.8134361465589813e-12, -1.1599958192849296e-11, -1.9116963988104842e-11, -3.1290138504516362e-11, -5.1974988016312575e-11, -8.9662684182680321e-11, -1.6579286469439681e-10, -3.4738102345884128e-10, -9.4838238439896699e-10], [6.2165273150312422e-16, 5.7484205699889039e-15, 1.6867739296635601e-14, 3.5957797732002537e-14, 6.6716225696584823e-14, 1.1583592932492726e-13, 1.9569967669074910e-13, 3.3040041517159050e-13, 5.7041364927312438e-13, 1.0328902596682850e-12, 2.0324964266382462e-12, 4.6303435209705743e-12, 1.4331546488541071e-11], [-5.8677480214307629e-18, -5.4451009407866967e-17, -1.6092383538296812e-16, -3.4682916795569071e-16, -6.5327604398197403e-16, -1.1567250383949552e-15, -2.0033705340162666e-15, -3.4887807105185773e-15, -6.2601596850644641e-15, -1.1898620713833651e-14, -2.4916884587527476e-14, -6.1719206013799589e-14, -2.1657216250189945e-13], [5.5385348885347371e-20, 5.1577842249611090e-19, 1.5352662771723984e-18, 3.3453225183238294e-18, 6.3967865561461220e-18, 1.1550927660233615e-17, 2.0508426964049943e-17, 3.6838901632881665e-17, 6.8703813521074835e-17, 1.3706892524330486e-16, 3.0546232570426443e-16, 8.2267334548598670e-16, 3.2727452301587379e-15], [-5.2277760822970123e-22, -4.8856131751378400e-21, -1.4646902279863803e-20, -3.2267045621522206e-20, -6.2636276304192960e-20, -1.1534603470430400e-19, -2.0994360059384016e-19, -3.8899054460258398e-19, -7.5400772257495118e-19, -1.5789960650738333e-18, -3.7447371675107801e-18, -1.0965650369366675e-17, -4.9456309970943133e-17], [4.9343429399981143e-24, 4.6277034388719634e-23, 1.3973297624944487e-22, 3.1122337047907903e-22, 6.1331375944265561e-22, 1.1518136504603596e-21, 2.1491552338257535e-21, 4.1074036129105954e-21, 8.2749954058746629e-21, 1.8189511964319813e-20, 4.5907513780516255e-20, 1.4616409751511828e-19, 7.4736193519368037e-19], [-4.6567024027909161e-26, -4.3827938815652947e-25, -1.3328911793732623e-24, -3.0014643675929588e-24, -6.0047361282141939e-24, -1.1500679229707804e-23, -2.1998961753662848e-23, -4.3368293274268225e-23, -9.0811967301097713e-23, -2.0953191762385929e-22, -5.6278163952623367e-22, -1.9482469616162900e-21, -1.1293777638497660e-20], [4.3915450783220597e-28, 4.1476915324835255e-27, 1.2705443043296192e-26, 2.8927923824907113e-26, 5.8758220004575791e-26, 1.1478052952182632e-25, 2.2510314972104119e-25, 4.5778578771386090e-25, 9.9641370291152599e-25, 2.4134034134985430e-24, 6.8987247510111064e-24, 2.5967797656379187e-23, 1.7066475930550410e-22], [-4.1603388392954673e-30, -3.9310981493435466e-29, -1.2154797001249108e-28, -2.7969345130648552e-28, -5.7620654405643334e-28, -1.1475531414646301e-27, -2.3059249467722912e-27, -4.8353229185521919e-27, -1.0935527951418760e-26, -2.7799401952780940e-26, -8.4559240069205603e-26, -3.4605682573586327e-25, -2.5783724852754917e-24]],
    ],
    [
        [[2.9157637605103392e-3, 2.6672551664335796e-2, 7.6585823817652776e-2, 1.5798929349459630e-1, 2.8043317345225410e-1, 4.6028142315922510e-1, 7.2595920035283259e-1, 1.1291285534908385e+0, 1.7706165649144555e+0, 2.8681451826514514e+0, 4.9649385870884394e+0, 9.7489119070580231e+0, 24.874893757714298e+0, 133.76925786773299e+0], [-1.2515614025623009e-4, -1.1459971730691827e-3, -3.2967804564920188e-3, -6.8196831405559435e-3, -1.2147484671044618e-2, -2.0020026475769938e-2, -3.1719444932930706e-2, -4.9571099340729656e-2, -7.8105758480003437e-2, -1.2709567957166334e-1, -2.2090633537908764e-1, -4.3522161240761480e-1, -1.1132333381238183e+0, -5.9951292687651949e+0], [2.0107629105635918e-6, 1.8157099643829561e-5, 5.0792564232488965e-5, 1.0071715660599682e-4, 1.6947379249801329e-4, 2.5995440603792055e-4, 3.7767300759203700e-4, 5.3354499006387320e-4, 7.5040931211124483e-4, 1.0801099287817881e-3, 1.6560429966918754e-3, 2.8991727475549863e-3, 6.7297467662587735e-3, 3.4103806216477750e-2], [-2.8637187054513830e-8, -2.4925104759833869e-7, -6.4634332043582349e-7, -1.1370034017815489e-6, -1.6103431663995711e-6, -1.9436366465749845e-6, -2.0230658894372217e-6, -1.7671086838004079e-6, -1.1488936364059018e-6, -2.1214459974224351e-7, 9.2540705601854148e-7, 2.0857371641448770e-6, 3.0600214315771786e-6, 3.6103291304320577e-6], [3.8089867433387814e-10, 3.0939574351917564e-9, 6.8832892247246587e-9, 9.1303147324891394e-9, 7.3557142977997872e-9, 4.5039109578787581e-10, -1.0446848866442483e-8, -2.1874307749869620e-8, -2.9025646835196216e-8, -2.7630785774090197e-8, -1.6084387039175497e-8, 3.1910192778009243e-9, 2.4040707791426546e-8, 3.8308568372500624e-8], [-4.8406144234166468e-12, -3.5077591866306912e-11, -5.7807977741632526e-11, -2.8609215701399180e-11, 6.2018500342697758e-11, 1.6678552435687072e-10, 2.0146849551621735e-10, 1.0274712774107912e-10, -1.1085660005644010e-10, -3.2451331774973988e-10, -3.8723678708384542e-10, -2.1993243067741816e-10, 1.0640345515455263e-10, 3.9117962021625331e-10], [5.9456678689159144e-14, 3.5999585725313711e-13, 2.8643217704182610e-13, -5.6547327605345162e-13, -1.5180381234892386e-12, -1.2299502751676465e-12, 7.7869275386314827e-13, 3.0383113460553440e-12, 3.0634522012703603e-12, -3.5915970571167424e-14, -3.9017699702361604e-12, -4.6668590746810434e-12, -1.0137908823330878e-12, 3.7749641627991485e-12], [-7.1042845729040452e-16, -3.2355501040065386e-15, 1.5746035183494133e-15, 1.2038636417611176e-14, 9.3503720217360628e-15, -1.4448496089250605e-14, -3.2581760049959775e-14, -1.0907942502884541e-14, 3.6477480733843626e-14, 4.8158680792635844e-14, -3.3153854923057362e-15, -5.6940569635348166e-14, -3.6681555897276165e-14, 3.3288431452231147e-14], [8.2867134926024630e-18, 2.3073843832298009e-17, -6.4272430932481259e-17, -1.0904132440361664e-16, 1.1386547615474213e-16, 3.1389751701427727e-16, -1.3263527878971665e-17, -5.2619956346506167e-16, -2.8252902270837879e-16, 5.3987157151358652e-16, 5.6310772798569933e-16, -3.7729767143833967e-16, -6.4291138459189949e-16, 2.4730369398540691e-16], [-9.4539543699199958e-20, -7.7795667625545488e-20, 9.7819271933057372e-19, -4.8714163144027899e-20, -2.9543230998848417e-18, -1.8954676040421086e-19, 5.8306855658064119e-18, 1.2866616116775871e-18, -8.3627135632610077e-18, -2.4085385192553515e-18, 9.2683772150528800e-18, 1.7536278923489749e-18, -8.4747029166226049e-18, 1.1062868890222803e-18], [1.0554385988981817e-21, -1.2779077018494356e-21, -9.3857514152565011e-21, 1.8004170807367856e-20, 1.8883261882801368e-20, -5.5006059583669642e-20, -2.0240526477616333e-20, 1.0160837232387332e-19, -1.4515313106084398e-22, -1.2694361091491323e-19, 4.6081740974363975e-20, 9.5038673751738132e-20, -8.6958300291113894e-20, -8.6116850380247773e-21], [-1.1525765499531898e-23, 3.6301258174768899e-23, 3.5948203983762103e-23, -2.9339769768141678e-22, 2.7564319644992204e-22, 5.2502728333605190e-22, -1.0550542733276413e-21, -1.3234039904648041e-22, 1.6465821099474899e-21, -9.8939564919988157e-22, -9.6355320244289732e-22, 1.5379827881755554e-21, -5.9271728920673876e-22, -3.4904102252988662e-22], [1.2291340019691691e-25, -5.8739716990307794e-25, 7.3328464019845624e-25, 1.9241268619203344e-24, -7.1685782894691101e-24, 5.9355413629543554e-24, 8.3915655788290092e-24, -2.0928798966096813e-23, 1.0724996753033377e-23, 1.3727688954451708e-23, -2.4071624418718605e-23, 1.3423466324075035e-23, 6.2654488536273642e-25, -6.7683868983621902e-24], [-1.2764869977872764e-27, 7.4354788961700415e-27, -2.0146690484835663e-26, 1.8090214625735759e-26, 4.5373363463257062e-26, -1.5926177582208969e-25, 1.8306554094271869e-25, 3.1770809485701093e-27, -2.7391820061936250e-25, 3.6043640770506194e-25, -2.0230540764339905e-25, -1.1543514320514097e-26, 1.0550360979723850e-25, -9.3444405833539922e-26]],
        [[2.6805179504402868e-3, 2.4516903298882978e-2, 7.0375307604761149e-2, 1.4511418000347197e-1, 2.5743426803411993e-1, 4.2224739392719855e-1, 6.6546301733948305e-1, 1.0341834835024484e+0, 1.6203589978367014e+0, 2.6225810124485196e+0, 4.5364059287396933e+0, 8.9017416879385384e+0, 22.702386052267949e+0, 122.05197474079065e+0], [-1.1034790304771063e-4, -1.0119132847882627e-3, -2.9196775500048081e-3, -6.0660863418365355e-3, -1.0866908173641249e-2, -1.8033320786932463e-2, -2.8797698283612012e-2, -4.5393329184390354e-2, -7.2165666764948106e-2, -1.1847298980629532e-1, -2.0761856846970745e-1, -4.1192762370844499e-1, -1.0592417926649857e+0, -5.7221144750897596e+0], [1.7007220137690483e-6, 1.5441395770460013e-5, 4.3660328529411554e-5, 8.7928651473888127e-5, 1.5089060150928752e-4, 2.3677855982559425e-4, 3.5252873351703598e-4, 5.1032003484504450e-4, 7.3377679792889104e-4, 1.0746986419414766e-3, 1.6653317336332044e-3, 2.9243415251342193e-3, 6.7688398121945026e-3, 3.4151082818201947e-2], [-2.3246036838858354e-8, -2.0492004612832390e-7, -5.4507526085377785e-7, -9.9612568041024571e-7, -1.4846130795480364e-6, -1.9114659094892766e-6, -2.1572737257120065e-6, -2.0968333663453233e-6, -1.6267209488772740e-6, -7.0571392995058351e-7, 6.0102019479732859e-7, 2.0949531116748851e-6, 3.4599804363685273e-6, 4.2911109526219153e-6], [2.9688724132150007e-10, 2.4718855386513745e-9, 5.7983723879083322e-9, 8.4476919942151190e-9, 8.2546932587880061e-9, 3.4639322252406681e-9, -6.3039401182970052e-9, -1.9124461397246817e-8, -3.0431268172711935e-8, -3.4010832597891420e-8, -2.4761196668083429e-8, -2.4635134358739252e-9, 2.5828970915862152e-8, 4.7118416712755302e-8], [-3.6252695682682640e-12, -2.7444272664690011e-11, -5.0606913719879232e-11, -3.8527130707966846e-11, 2.9046468217111383e-11, 1.3352678363275258e-10, 2.0934795547112495e-10, 1.7016903294731382e-10, -2.6373512666562535e-11, -3.0735881751900622e-10, -4.7963846600324029e-10, -3.5234534055024052e-10, 6.7115560314058227e-11, 4.9389148305898287e-10], [4.2818299701439365e-14, 2.7926204900966039e-13, 3.0652478928042465e-13, -2.7665247239489925e-13, -1.2200561948355048e-12, -1.4976541304650158e-12, -1.0958269693450250e-13, 2.5095557394507123e-12, 3.9138371730177714e-12, 1.5339433972365537e-12, -3.6902181482348885e-12, -6.4146814730147483e-12, -2.3798387594140131e-12, 4.8231394357415469e-12], [-4.9245735233789090e-16, -2.5491835139403350e-15, 1.2444778381615469e-17, 8.6367225862016956e-15, 1.1456199974733173e-14, -4.8885721444127717e-15, -2.9886466174685790e-14, -2.6249573928605264e-14, 2.2766974961770493e-14, 6.2996492201600509e-14, 2.0293714248131772e-14, -6.7126867282969584e-14, -6.2856972021191445e-14, 4.1736189222419220e-14], [5.5352122149895283e-18, 1.9671689634469173e-17, -3.5363735334441603e-17, -1.0067868350765324e-16, 2.3176246350815043e-17, 2.7358999810035972e-16, 1.7217338259391381e-16, -4.1075447362594261e-16, -5.6527318994275420e-16, 3.5354096131260830e-16, 9.1638638542977782e-16, -2.2775931283391839e-16, -1.0166346439715922e-15, 2.7618669415841812e-16], [-6.0940080705776190e-20, -1.0403630245753624e-19, 6.4157198750845753e-19, 4.4258746206034553e-19, -2.0480836773742780e-18, -1.8722649581590270e-18, 4.2392617200818282e-18, 4.9488359542080344e-18, -6.8264370059652134e-18, -8.0947738603243943e-18, 9.8908869845084466e-18, 7.0894793700663717e-18, -1.2440255251201754e-17, 3.3524767641723610e-19], [6.5764210657755346e-22, -1.8244998920032706e-22, -7.3332897901592007e-21, 7.3135004289843532e-21, 2.4414768645803147e-20, -2.8406622707574989e-20, -5.5165700588369309e-20, 7.4888563565697001e-20, 7.7686187807348728e-20, -1.4922804485463022e-19, -2.4828663450360576e-20, 1.7582552943927475e-19, -1.0969548288562320e-19, -3.3564505292183503e-20], [-6.9580516798594385e-24, 1.5799139112122536e-23, 5.1814623492942733e-23, -1.9104912805905652e-22, -2.8874833485985739e-25, 6.2655219201782940e-22, -4.9008082502240692e-22, -1.0308287155504321e-21, 1.7406804156579197e-21, 1.2606535493957959e-22, -2.3103686931115991e-21, 2.0868453973793324e-21, -3.6186552434895609e-22, -8.5173880637808660e-22], [7.2092047106088035e-26, -2.9592513781312434e-25, 3.1693275728159370e-26, 2.1317202296002600e-24, -4.2032123941142911e-24, -1.2384708258187471e-24, 1.3700656268951595e-23, -1.4546982761063166e-23, -8.0100179009672527e-24, 3.2279407494736464e-23, -3.0201299041115930e-23, 7.2855983669272551e-24, 1.0675785355877389e-23, -1.5228639723152943e-23], [-7.3139731865631873e-28, 4.0551394832886112e-27, -8.0702161020334981e-27, -6.2675562391884546e-27, 6.0471766758734618e-26, -1.0648269887503280e-25, 1.7500766487913115e-26, 2.2741890725552499e-25, -4.1050293008230886e-25, 3.0316420443069623e-25, 1.3548573352755846e-26, -2.6380951159103039e-25, 3.0187678343337553e-25, -2.9752768056847707e-25]],
        [[2.4725981559945031e-3, 2.2609269456271266e-2, 6.4865586483382293e-2, 1.3364916586564084e-1, 2.3685276902942405e-1, 3.8800313590512713e-1, 6.1060487223353659e-1, 9.4739621693196501e-1, 1.4818302155103380e+0, 2.3941989768369025e+0, 4.1345090307353861e+0, 8.1013599187046440e+0, 20.638189676423261e+0, 110.88112708397059e+0], [-9.7782352927328090e-5, -8.9758539280036430e-4, -2.5950557104962283e-3, -5.4082339132090589e-3, -9.7287651537441064e-3, -1.6229710371576500e-2, -2.6082416306777373e-2, -4.1416340184121034e-2, -6.6381818304399688e-2, -1.0991897701803307e-1, -1.9427455977516635e-1, -3.8843359696457010e-1, -1.0049178910315733e+0, -5.4486862293866134e+0], [1.4480469372410914e-6, 1.3202659285683209e-5, 3.7643958689549787e-5, 7.6759734591189995e-5, 1.3388201211615923e-4, 2.1425522180004059e-4, 3.2617323051383945e-4, 4.8344425592368081e-4, 7.1133436814792330e-4, 1.0627703431106453e-3, 1.6698354325954979e-3, 2.9489830474925572e-3, 6.8128715960462321e-3, 3.4207446987950208e-2], [-1.9024401429912554e-8, -1.6941983646531073e-7, -4.6000062835440671e-7, -8.6741182704312628e-7, -1.3493717417208431e-6, -1.8366612541967258e-6, -2.2250556592304377e-6, -2.3725995683580952e-6, -2.1125600600449497e-6, -1.2964455206660676e-6, 1.2354376580092300e-7, 1.9901465650596908e-6, 3.8802090127792535e-6, 5.1307329630001247e-6], [2.3363680496499044e-10, 1.9845942808236017e-9, 4.8592509555867299e-9, 7.6285279987430089e-9, 8.5689601823872343e-9, 5.7687678556142072e-9, -2.2073055822898185e-9, -1.5185231405068937e-8, -2.9979219866795934e-8, -3.9641669730996965e-8, -3.5175112788250769e-8, -1.1205251871394759e-8, 2.6436694157182908e-8, 5.8253625859342729e-8], [-2.7449400922043846e-12, -2.1530857878738002e-11, -4.3354585262784633e-11, -4.2612539252875523e-11, 3.6367595383478692e-12, 9.6861011420559707e-11, 1.9742365503263122e-10, 2.2027611672429622e-10, 7.2962162187023903e-11, -2.4840860072530864e-10, -5.5775459076768226e-10, -5.2938702077011778e-10, -1.5241319852889413e-11, 6.2466868627573042e-10], [3.1212466843481830e-14, 2.1613150847061187e-13, 2.9412458456523898e-13, -7.7217099771619197e-14, -8.9865576225933706e-13, -1.5233579817106627e-12, -8.4955097595012524e-13, 1.6208883613437677e-12, 4.2662223992064536e-12, 3.4044148320813397e-12, -2.6605650759424207e-12, -8.3471640373605848e-12, -4.6687753805243426e-12, 6.1149549023063090e-12], [-3.4589803919751146e-16, -1.9798853114243674e-15, -8.0182839546805003e-16, 5.7116952378261101e-15, 1.1203493367120145e-14, 2.6207425541113344e-15, -2.2391619035146138e-14, -3.6064183788456393e-14, 1.4859031050691278e-15, 6.8535315111138654e-14, 5.4899748817647953e-14, -6.8790944310102270e-14, -1.0342118027376687e-13, 5.0419945635229821e-14], [3.7494531909359184e-18, 1.5929465757470495e-17, -1.7002783923884215e-17, -8.1242594931608166e-17, -3.3439914763949286e-17, 1.9209359668670555e-16, 2.8162082124947780e-16, -1.9113676868816858e-16, -7.3821430154006886e-16, -3.9476084169760611e-17, 1.2263145359497281e-15, 1.7666751414923717e-16, -1.5454412512437159e-15, 2.5272840320858846e-16], [-3.9860498273778633e-20, -1.0094787345461023e-19, 3.9307701331356244e-19, 5.9555718697639040e-19, -1.1203429927194374e-18, -2.4914171556461218e-18, 1.7923988172072531e-18, 6.8788534667727959e-18, -2.3747885967007475e-18, -1.3451289215218648e-17, 6.4565910819316247e-18, 1.5997374655650213e-17, -1.6927456181552663e-17, -2.0235947057803618e-18], [4.1587902838209285e-22, 2.6408023231301206e-22, -5.1336138204687484e-21, 9.9607367253232836e-22, 2.1018584953977132e-20, -3.7350114413041985e-21, -6.2637639691650246e-20, 1.8925856538720859e-20, 1.3853037861048767e-19, -1.0537905787419947e-19, -1.5610048248475374e-19, 2.6854041902296357e-19, -1.0727036208204197e-19, -9.2440631392133302e-20], [-4.2625228625346277e-24, 5.7260158354419116e-24, 4.6267745445909643e-23, -1.0053415573202743e-22, -1.3195498414707243e-22, 4.6716906369419009e-22, 1.2806411705868704e-22, -1.3970720446794622e-21, 8.7261972013490352e-22, 1.9248462309414704e-21, -3.5539284867750313e-21, 1.9250075913126892e-21, 6.6926992376186427e-22, -1.9699088183687279e-21], [4.2859279605969811e-26, -1.4054199384678005e-25, -2.1157071984323862e-25, 1.5856876715157379e-24, -1.4350841512533164e-24, -4.7308860740876422e-24, 1.0963592016205243e-23, -1.6236650695620953e-25, -2.6896887828445267e-23, 3.9258264285722261e-23, -1.7052226488091690e-23, -1.8384306929756413e-23, 3.5667230605636896e-23, -3.3687934418226685e-23], [-4.2277133714071167e-28, 2.1036173415877990e-27, -2.0875513440448604e-27, -1.2702773594340132e-26, 4.3268006401637213e-26, -2.9457643922763023e-26, -1.0808814351157260e-25, 2.9078449755064786e-25, -2.6500812938930620e-25, -9.0096029374121821e-26, 5.3946185386889873e-25, -7.6742552592668635e-25, 6.9318064219324547e-25, -5.6684028583432923e-25]],
        [[2.2879371633598263e-3, 2.0913642557999978e-2, 5.9960037786906475e-2, 1.2341523598642930e-1, 2.1841666309853053e-1, 3.5718916044178752e-1, 5.6096464223199693e-1, 8.6833824456561512e-1, 1.3546713163522834e+0, 2.1828060806323883e+0, 3.7593159643997625e+0, 7.3481574863910776e+0, 18.683009347493847e+0, 100.25762101368743e+0], [-8.7051522777583203e-5, -7.9958744637407185e-4, -2.3147258038757935e-3, -4.8337820204278005e-3, -8.7201497095891499e-3, -1.4602124738749125e-2, -2.3580141616633170e-2, -3.7666454491854583e-2, -6.0800553671134433e-2, -1.0149017172304694e-1, -1.8092038124471261e-1, -3.6475013194211339e-1, -9.5022154549280500e-1, -5.1747635295662946e+0], [1.2404949891397607e-6, 1.1346795774007412e-5, 3.2563044415879797e-5, 6.7054817319195690e-5, 1.1851106098960692e-4, 1.9282667799872552e-4, 2.9938683535930405e-4, 4.5366654617725996e-4, 6.8317173948407150e-4, 1.0432595906853215e-3, 1.6675634158364522e-3, 2.9714027029150982e-3, 6.8619392981449095e-3, 3.4275047591137341e-2], [-1.5687766854781215e-8, -1.4084728415135527e-7, -3.8881439349016252e-7, -7.5222473155622156e-7, -1.2127542852621594e-6, -1.7308132832578740e-6, -2.2300868282502570e-6, -2.5785582611171910e-6, -2.5750249818953339e-6, -1.9653743468178157e-6, -5.3136345935811021e-7, 1.7146400860304896e-6, 4.2935768288562710e-6, 6.1712071574686592e-6], [1.8550933225242187e-10, 1.6016420448026063e-9, 4.0606634882014324e-9, 6.7692654188010196e-9, 8.4506646135568751e-9, 7.3495634104513818e-9, 1.4919454103829783e-9, -1.0475080896349997e-8, -2.7506700232353607e-8, -4.3640071522424201e-8, -4.6820580744771291e-8, -2.3946487759473236e-8, 2.4745430425419743e-8, 7.2333270400438461e-8], [-2.0997241980239675e-12, -1.6954617012011161e-11, -3.6614738134076005e-11, -4.2820498614138875e-11, -1.4319288663534398e-11, 6.1792613726408509e-11, 1.7057195369805770e-10, 2.4659981436046161e-10, 1.7314203561909723e-10, -1.4428935621299707e-10, -5.9856356795554822e-10, -7.5158390684493930e-10, -1.6822037663054379e-10, 7.8918495814418798e-10], [2.3012282250253824e-14, 1.6730165853420081e-13, 2.6592305217584199e-13, 4.9547725592803268e-14, -6.0491589489672635e-13, -1.3773958503595116e-12, -1.3439916886675827e-12, 5.6304408304229025e-13, 3.9721959972788045e-12, 5.2282371915267854e-12, -5.4945382684254817e-13, -1.0091949748853437e-11, -8.3539347618303420e-12, 7.6227554641634079e-12], [-2.4599816997732592e-16, -1.5258612513069865e-15, -1.1553454760252854e-15, 3.4552550023909590e-15, 9.6380936041326139e-15, 7.3399025074957641e-15, -1.2811490097615432e-14, -3.8190480834428904e-14, -2.2384664073786218e-14, 5.8908147400047794e-14, 9.6340276510697361e-14, -5.1706367503157891e-14, -1.6335998293418544e-13, 5.6425601658053295e-14], [2.5736944084418318e-18, 1.2530686047698836e-17, -6.0868628200585728e-18, -5.9964755378925838e-17, -6.0169172017331385e-17, 1.0403337394354245e-16, 3.0365501413304975e-16, 5.5673052598559482e-17, -7.1845662452395158e-16, -5.7438928900325422e-16, 1.3073719714833877e-15, 9.6277570139735980e-16, -2.2193006693331554e-15, 8.7294418878163829e-17], [-2.6441367781219882e-20, -8.6989602413402164e-20, 2.2519684259405597e-19, 5.6698477489506762e-19, -4.0885212777365077e-19, -2.2996370907610038e-18, -4.6771907426640492e-19, 6.4552314963092336e-18, 3.5176665192141561e-18, -1.5456042159681555e-17, -3.0306479794576810e-18, 2.8007172125390701e-17, -1.9975378584620717e-17, -8.0429336130082535e-18], [2.6677139123535240e-22, 4.0041903602282479e-22, -3.3447099802079838e-21, -1.9845850240965920e-21, 1.4383821433921069e-20, 1.1569314583046869e-20, -4.7660499664481376e-20, -3.7752464740643207e-20, 1.4521108144468312e-19, 1.6476733330335287e-20, -3.1749115703702743e-19, 3.1680088136835599e-19, -2.4765276639256325e-20, -2.2626637579680479e-19], [-2.6499010849583251e-24, 1.0953486088190079e-24, 3.4788086654660018e-23, -4.0035030713627669e-23, -1.5651763278235755e-22, 2.2831417941136190e-22, 4.9886867194691891e-22, -1.0790820821577956e-21, -6.0592487810937932e-22, 3.4573699880569260e-21, -3.4218158287164446e-21, -1.8080188519174762e-22, 3.4903760383211222e-21, -4.4296883511370341e-21], [2.5829785314066621e-26, -6.1513344889663932e-26, -2.4611203700167966e-25, 9.5008446541997112e-25, 2.1560053125674888e-25, -4.7840539467665581e-24, 4.2790375916297198e-24, 1.2301323857394970e-23, -3.1452670447401001e-23, 1.9582737204525612e-23, 2.8098138168256216e-23, -7.4808146647764440e-23, 8.7299072998340450e-23, -7.3888242873634075e-23], [-2.4855193447772168e-28, 1.0401131035339041e-27, 3.3401215935170377e-28, -1.1064196799781059e-26, 2.0717684912196886e-26, 2.1143726148223748e-26, -1.3273666596727827e-25, 1.6431228872614468e-25, 1.0731618676860632e-25, -6.6258275617919299e-25, 1.1700493132876477e-24, -1.3882257007887733e-24, 1.3180955155369652e-24, -1.1109181029429212e-24]],
        [[2.1231955725336919e-3, 1.9400181212044368e-2, 5.5577059931849452e-2, 1.1425678309214935e-1, 2.0187997272424220e-1, 3.2946321939202257e-1, 5.1611516025516948e-1, 7.9653492053298817e-1, 1.2384326446198797e+0, 1.9880886357067156e+0, 3.4107859281587140e+0, 6.6424881944772376e+0, 16.837629459728955e+0, 90.182543562213596e+0], [-7.7833124739721762e-5, -7.1516252575612770e-4, -2.0718334963767245e-3, -4.3316735478981984e-3, -7.8280012976124772e-3, -1.3140508644530757e-2, -2.1291437935644990e-2, -3.4163364320274706e-2, -5.5465967189960215e-2, -9.3250475481975788e-2, -1.6761902414204147e-1, -3.4090435109125983e-1, -8.9511354346932456e-1, -4.9002459894270216e+0], [1.0687560496410959e-6, 9.7998648285129281e-6, 2.8264022106712023e-5, 5.8649998783523955e-5, 1.0475750845083032e-4, 1.7279764684175734e-4, 2.7287563427169121e-4, 4.2188239452446053e-4, 6.4976115803192388e-4, 1.0154139329549628e-3, 1.6562976118162751e-3, 2.9891396808901797e-3, 6.9156868534856972e-3, 3.4356600604119014e-2], [-1.3027750446031608e-8, -1.1772933575629454e-7, -3.2936667956362429e-7, -6.5067392586561219e-7, -1.0805358454756730e-6, -1.6050538757363085e-6, -2.1807792846717972e-6, -2.7063266964181011e-6, -2.9825076796300907e-6, -2.6793672084379394e-6, -1.3759794036145892e-6, 1.1976661218386021e-6, 4.6499868508615581e-6, 7.4652878784021071e-6], [1.4852448809739728e-10, 1.2994637511564157e-9, 3.3894848367757033e-9, 5.9315406012650466e-9, 8.0397894677063872e-9, 8.2731201344600346e-9, 4.5573343761962212e-9, -5.4926631828704613e-9, -2.3154090455912957e-8, -4.5150352963888335e-8, -5.8681557900274352e-8, -4.1495244762905118e-8, 1.8961287623632343e-8, 9.0074638615396026e-8], [-1.6215895141185599e-12, -1.3409537251105120e-11, -3.0636152932594799e-11, -4.0668979305075989e-11, -2.5826400574805506e-11, 3.1504617883931325e-11, 1.3508191184252750e-10, 2.4768439940248778e-10, 2.5851087908001974e-10, -1.5975055348537400e-12, -5.7484783048792629e-10, -1.0066652847903397e-9, -4.3229109751130762e-10, 9.9106502837778934e-10], [1.7147709879832696e-14, 1.2974286346780331e-13, 2.3189747097742013e-13, 1.2237359237283930e-13, -3.6350261686878712e-13, -1.1369857541606818e-12, -1.5715682308582940e-12, -4.4897228942300603e-13, 3.0501592884875474e-12, 6.5393788940765674e-12, 2.6983509484578272e-12, -1.0939841083771336e-11, -1.4029582133644081e-11, 9.1832426061034159e-12], [-1.7701866494649478e-16, -1.1718447036435044e-15, -1.2434431401056134e-15, 1.8449230798512242e-15, 7.5750718608007886e-15, 9.4494896715653518e-15, -3.6862931805216679e-15, -3.3063618778229752e-14, -4.2305566546311373e-14, 3.2060783474462190e-14, 1.3371807846410633e-13, -2.4095232970314569e-15, -2.4568960945750187e-13, 5.2386281175612845e-14], [1.7887933664011070e-18, 9.6923248454773044e-18, -5.0015333057648446e-20, -4.1298766181250671e-17, -6.6139604070285048e-17, 3.1416984127108396e-17, 2.5816843787956765e-16, 2.5119849771341407e-16, -4.9750422910639351e-16, -1.0807713556337903e-15, 9.3868975390279847e-16, 2.1856030969686257e-15, -2.9060434230421799e-15, -4.2338408646603760e-16], [-1.7779032834340057e-20, -7.0710383998306189e-20, 1.1864797927114113e-19, 4.6387833941003091e-19, 3.4951178707192862e-20, -1.6986521923522170e-18, -1.8980371471823190e-18, 4.1925082064598224e-18, 8.3826885282147449e-18, -1.1617194104915514e-17, -1.8113955965856955e-17, 3.9191522345631855e-17, -1.6390908504570783e-17, -2.2278954658354035e-17], [1.7343513134875471e-22, 3.9970730286534175e-22, -2.0629599755759877e-21, -2.9292410178009875e-21, 8.0202712244871134e-21, 1.7064828451347841e-20, -2.3467470020356469e-20, -7.0121905968182719e-20, 8.9033277037262016e-20, 1.7515447210455673e-19, -4.1534533066811514e-19, 2.0272682841922828e-19, 2.4833102629420632e-19, -5.2430691249943165e-19], [-1.6724476944033415e-24, -8.2672815856347779e-25, 2.3799521837819816e-23, -6.7263819709642268e-24, -1.2779211308540140e-22, 3.4620635995516866e-23, 5.5415572072740341e-22, -3.6458793742619301e-22, -1.8296209558371759e-21, 3.4037387826584941e-21, -4.9096017548589934e-22, -5.6324974728842575e-21, 9.6019575417322471e-21, -9.8054250613958943e-21], [1.5751643515609008e-26, -2.3371539778577280e-26, -2.0605125730463350e-25, 4.6972531020879594e-25, 8.4430081000137917e-25, -3.1584446731563380e-24, -1.5502633654419207e-24, 1.5793752178216008e-23, -1.6811196574777481e-23, -2.4099896292006405e-23, 9.4476308021994625e-23, -1.5274054670855347e-22, 1.7223806169176625e-22, -1.6118810924065635e-22], [-1.4851627178461698e-28, 4.8157845243460929e-28, 1.0093616150321636e-27, -7.3979939163701645e-27, 4.8433242220194336e-27, 3.6246355484264987e-26, -8.4493426530827164e-26, -2.7495634157063335e-26, 4.1856779319962836e-25, -9.1964547853111316e-25, 1.2083221397430105e-24, -1.4094897845722508e-24, 1.8649320919255301e-24, -2.4157643614934544e-24]],
        [[1.9756112954696064e-3, 1.8044018085092019e-2, 5.1647610467451448e-2, 1.0603900918295677e-1, 1.8702248586430758e-1, 3.0450520544598409e-1, 4.7563342175224849e-1, 7.3147960091696116e-1, 1.1325812926409984e+0, 1.8096005454229431e+0, 3.0887341490764447e+0, 5.9846290872226440e+0, 15.102907692119439e+0, 80.657206406932304e+0], [-6.9870337162827221e-5, -6.4208049734563200e-4, -1.8606536412072981e-3, -3.8921532301789015e-3, -7.0396621229112755e-3, -1.1832881060130076e-2, -1.9211678771000089e-2, -3.0919331664033831e-2, -5.0416919547365786e-2, -8.5268000352774832e-2, -1.5445149601310123e-1, -3.1694665466741988e-1, -8.3956048014527774e-1, -4.6250087639286635e+0], [9.2567923789174345e-7, 8.5035300311053189e-6, 2.4617739917733910e-5, 5.1385056888105907e-5, 9.2544503991798007e-5, 1.5434745952072932e-4, 2.4722624538113856e-4, 3.8903993654091301e-4, 6.1193060409921770e-4, 9.7895431552036955e-4, 1.6337880338528681e-3, 2.9988178388198206e-3, 6.9729555467013548e-3, 3.4455525389342616e-2], [-1.0890028321590069e-8, -9.8924811477303102e-8, -2.7974610783974361e-7, -5.6210167122932976e-7, -9.5643759903635842e-7, -1.4690345182455563e-6, -2.0883173148433958e-6, -2.7554620955418664e-6, -3.3080653132675767e-6, -3.3932706185487743e-6, -2.4020161095840693e-6, 3.5854658838771574e-7, 4.8633721530763812e-6, 9.0774875273084672e-6], [1.1983775273716653e-10, 1.0599250937269668e-9, 2.8296109359436085e-9, 5.1510056793972831e-9, 7.4519772318818304e-9, 8.6521319576292773e-9, 6.8779725789896739e-9, -7.1650292132127904e-10, -1.7355821463720200e-8, -4.3561777502600570e-8, -6.9213068587657351e-8, -6.4213042665760861e-8, 6.3348440389304564e-9, 1.1220707002154121e-7], [-1.2636013373593497e-12, -1.0656644768091087e-11, -2.5485166453595866e-11, -3.7246841082646480e-11, -3.2241282521522103e-11, 7.4538266309846166e-12, 9.6990751641956672e-11, 2.2682759215433585e-10, 3.1600035850332930e-10, 1.6188062989382406e-10, -4.6248046063218896e-10, -1.2607828381993346e-9, -8.6251436027899232e-10, 1.2266241789655130e-9], [1.2905119682577130e-14, 1.0091219344925999e-13, 1.9759827440331640e-13, 1.5787724920264947e-13, -1.8046063617115682e-13, -8.6657378455972036e-13, -1.5704214844567557e-12, -1.2435040353856361e-12, 1.6920213769854954e-12, 6.9012308210859595e-12, 6.7422808799042226e-12, -9.8083789922549274e-12, -2.2280275196461071e-11, 1.0305305357746593e-11], [-1.2881074688870435e-16, -8.9942142624920619e-16, -1.1907466001745116e-15, 7.6770899104478245e-16, 5.5303934811992520e-15, 9.6087319874752624e-15, 3.3464739380899840e-15, -2.3170133826886735e-14, -5.2878293551604848e-14, -7.5974174714689095e-15, 1.5016198586332587e-13, 9.1045699621387804e-14, -3.4522090656330489e-13, 2.0956761600594370e-14], [1.2577264756767353e-18, 7.4233393205973690e-18, 2.9632491401536597e-18, -2.6728364446495927e-17, -6.0349067287053251e-17, -1.7437962590198301e-17, 1.7851940274501286e-16, 3.4973241858144840e-16, -1.5258695221361495e-16, -1.3410949220162774e-15, -4.0488431693640351e-18, 3.6614110873453449e-15, -3.1908118865002044e-15, -1.7314321807530712e-15], [-1.2115841849708729e-20, -5.5704028858217480e-20, 5.4353042583845970e-20, 3.4618641931616652e-19, 2.5574847386782342e-19, -1.0235760400472596e-18, -2.3841837773521476e-18, 1.2790009878878816e-18, 1.0178490717003879e-17, -2.1187058637359924e-18, -3.3631808409357056e-17, 3.9966751919135726e-17, 4.7672342431229911e-18, -5.4686525479348567e-17], [1.1405944736245348e-22, 3.4586271988933676e-22, -1.2144659754892535e-21, -2.8489941554026266e-21, 3.3319817843313344e-21, 1.5905945745909634e-20, -1.9717328770978768e-21, -7.0690964154032406e-20, -1.0428036024543594e-21, 2.8367621864740480e-19, -3.1899242377562486e-19, -2.2676380763208961e-19, 8.8614944161971564e-19, -1.1805568043165765e-18], [-1.0749960362030110e-24, -1.4908175404640298e-24, 1.5189913921496361e-23, 8.0027679311650265e-24, -8.5221387148776284e-23, -7.3191848862890619e-23, 4.0131622561778626e-22, 2.9818142627940714e-22, -2.0766282927175186e-21, 1.2128082952445831e-21, 5.1611448922861738e-21, -1.4175100639758731e-20, 2.0080047971749584e-20, -2.1517658146678505e-20], [9.6206412121345929e-27, -6.8929961558118064e-27, -1.5345085735260917e-25, 1.7064537676767399e-25, 8.6147803082373664e-25, -1.3967873208875520e-24, -4.2763446458881253e-24, 1.0796254783990821e-23, 6.5397010804928802e-24, -6.3234171477644969e-23, 1.2973652606897157e-22, -1.8625833600052081e-22, 2.5663761016865083e-22, -3.5063312595079731e-22], [-9.2851393734841905e-29, 1.7710631662305662e-28, 9.2817937580379407e-28, -4.3167595677844082e-27, -3.0935180398241978e-27, 2.9193375519513984e-26, -2.2306619816934551e-26, -1.4575760406885629e-25, 4.2171467204497001e-25, -4.6549825539537667e-25, -9.5704605021413152e-26, 5.7357490407661604e-25, 9.1382729127186311e-25, -5.2037773084979202e-24]],
        [[1.8428840420287594e-3, 1.6824319529145240e-2, 4.8113133522025268e-2, 9.8645375846591050e-2, 1.7364857068268315e-1, 2.8202006401754330e-1, 4.3910992761345864e-1, 6.7264863198706396e-1, 1.0365141837015381e+0, 1.6467590696959668e+0, 2.7927964726668210e+0, 5.3747263040545712e+0, 13.479755407067617e+0, 71.683200854817902e+0], [-6.2956845865071731e-5, -5.7852773222265169e-4, -1.6764069996930246e-3, -3.5067078296986468e-3, -6.3432384476900562e-3, -1.0666257224591587e-2, -1.7332102907382251e-2, -2.7939135999496352e-2, -4.5684490502286994e-2, -7.7610787810170129e-2, -1.4151595327587733e-1, -2.9295836182753011e-1, -7.8354318775523328e-1, -4.3488963688731478e+0], [8.0572069231018786e-7, 7.4115556867924858e-6, 2.1516413253475648e-5, 4.5110433427284916e-5, 8.1760735764302650e-5, 1.3755115543183541e-4, 2.2288421619703863e-4, 3.5604951364698628e-4, 5.7078197884038745e-4, 9.3418872143024030e-4, 1.5980465008001801e-3, 2.9960853756356274e-3, 7.0312513165815636e-3, 3.4576080435873913e-2], [-9.1591215408460762e-9, -8.3547586018013228e-8, -2.3830341437328816e-7, -4.8543349334462459e-7, -8.4255104929644766e-7, -1.3304478604979421e-6, -1.9647566054245262e-6, -2.7324527249262562e-6, -3.5335010324289946e-6, -4.0555186466765435e-6, -3.5732159588661555e-6, -8.8225636948381004e-7, 4.7941845949015646e-6, 1.1082558603987025e-5], [9.7392713792105845e-11, 8.6910243856366889e-10, 2.3646925056879519e-9, 4.4452471258645818e-9, 6.7752950606006376e-9, 8.6145684523638159e-9, 8.4514764611155869e-9, 3.4757058630139197e-9, -1.0751086812998070e-8, -3.8710171407229177e-8, -7.6509065417417883e-8, -9.1502486180779932e-8, -1.7103586750747732e-8, 1.3921892845077997e-7], [-9.9298462737418621e-13, -8.5118756752319163e-12, -2.1130680746766606e-11, -3.3285738170861581e-11, -3.4923089489296334e-11, -1.0208298730510647e-11, 6.0991512392970184e-11, 1.9048678354468024e-10, 3.3862402054825192e-10, 3.2011741573568402e-10, -2.5141972057933072e-10, -1.4511190523221632e-9, -1.5243231496267927e-9, 1.4725352302467963e-9], [9.8020883866693538e-15, 7.8770848732209621e-14, 1.6581918281341997e-13, 1.6912011412855406e-13, -5.1117516790374276e-14, -6.1004702081525070e-13, -1.4095734802506309e-12, -1.7323679675934422e-12, 1.9710371694775753e-13, 6.0921699664444568e-12, 1.0748529523923757e-11, -5.4227730099262588e-12, -3.3290279003246373e-11, 9.7431012906865956e-12], [-9.4746730625451473e-17, -6.9142304525001051e-16, -1.0728066831648436e-15, 9.0613496469792381e-17, 3.7656233518297972e-15, 8.5766575675935343e-15, 7.7013938728429184e-15, -1.1754086046847821e-14, -5.2076536578391020e-14, -4.9494512378667928e-14, 1.2874865829266937e-13, 2.2811231980914613e-13, -4.3579159982710652e-13, -7.7254868391922736e-14], [8.9339929647501196e-19, 5.6505152870789592e-18, 4.1880773691626410e-18, -1.6215451289464159e-17, -4.9541101695029805e-17, -4.3753468527553391e-17, 9.4955830302019231e-17, 3.4922163055491175e-16, 1.9243637582848173e-16, -1.2088310408388788e-15, -1.3736772336151732e-15, 4.7643626404068857e-15, -2.1347874709947790e-15, -4.8314823134384150e-15], [-8.3793766329195982e-21, -4.3253424956670471e-20, 1.7134821531221989e-20, 2.4096758994530385e-19, 3.2548562307198194e-19, -4.6656515885400382e-19, -2.1725914379360026e-18, -1.1621265650284054e-18, 8.4720811732950201e-18, 9.3482907652846834e-18, -4.0114999676961915e-17, 1.6045775878837498e-17, 6.1542804125156395e-17, -1.2691838953177279e-16], [7.5380367621769514e-23, 2.7533735302029478e-22, -6.9246826157817447e-22, -2.3853434718626231e-21, 4.1799688396924490e-22, 1.1685199980108495e-20, 1.0984053482250868e-20, -4.9001651273591666e-20, -7.8758888433022063e-20, 2.6572836866195857e-19, 3.3380783060148623e-20, -1.0179539829419998e-18, 2.0398411348026857e-18, -2.6124886490658132e-18], [-7.1448702688191518e-25, -1.6801290284918546e-24, 8.8579342858860898e-24, 1.1735368335413053e-23, -4.9193627613319584e-23, -1.0936532667206533e-22, 1.8773608028450108e-22, 6.2268260929822220e-22, -1.3299850179396220e-21, -2.0369721251880922e-21, 1.0361516979458623e-20, -2.0661690486884135e-20, 3.1819736113987404e-20, -4.6615927748717208e-20], [5.6688847678355711e-27, -2.4012785086908810e-27, -1.1308769036642955e-25, 1.9140582921037536e-27, 6.1874102251063004e-25, -2.2794721867319300e-25, -4.2814835112135650e-24, 2.7129553111498172e-24, 2.2239219090414807e-23, -6.4192206534045418e-23, 6.7541302434609080e-23, -4.2716560172896197e-23, 1.8254692845718596e-22, -7.3388812960961416e-22], [-6.1642524384594343e-29, 1.5889912519451809e-29, 6.2525678819892554e-28, -2.3179269019731537e-27, -5.5331830836352084e-27, 1.5769892967443184e-26, 1.7322934700993293e-26, -1.4784064763629989e-25, 1.5628258626631503e-25, 4.4606342735669169e-25, -2.3057421564311100e-24, 5.3163130497931288e-24, -4.9521387937302997e-24, -9.5763350366080811e-24]],
        [[1.7230858233564373e-3, 1.5723540441945019e-2, 4.4923829001509146e-2, 9.1975218219687655e-2, 1.6158542842549474e-1, 2.6173904254623272e-1, 4.0615581128776912e-1, 6.1951577156805546e-1, 9.4957546016942814e-1, 1.4988498134441956e+0, 2.5223982750656856e+0, 4.8127256935581613e+0, 11.969096219378375e+0, 63.262466152180328e+0], [-5.6925657889603855e-5, -5.2302147694653094e-4, -1.5151018245867560e-3, -3.1679652239433539e-3, -5.7278054824772880e-3, -9.6273866075465479e-3, -1.5640957542106017e-2, -2.5220677831203510e-2, -4.1290253037026160e-2, -7.0341936551826887e-2, -1.2892419153412789e-1, -2.6905915539243207e-1, -7.2707032859575584e-1, -4.0717155793675232e+0], [7.0454463647295815e-7, 6.4871162396563833e-6, 1.8870509694922642e-5, 3.9690721036326470e-5, 7.2277376835397222e-5, 1.2240368123199761e-4, 2.0015299227694841e-4, 3.2371190008102993e-4, 5.2757086946658902e-4, 8.8204186533931046e-4, 1.5477056008968793e-3, 2.9757401046443045e-3, 7.0859813152557405e-3, 3.4723446284241548e-2], [-7.7477809820501721e-9, -7.0907362378216095e-8, -2.0364295008620449e-7, -4.1941482069578308e-7, -7.3976791507910113e-7, -1.1949649599712861e-6, -1.8215338221862461e-6, -2.6487123506606812e-6, -3.6515614287807972e-6, -4.6162635807809891e-6, -4.8224525751892568e-6, -2.5830611856696790e-6, 4.2289696595908938e-6, 1.3557260300763864e-5], [7.9686221026962640e-11, 7.1630153776639218e-10, 1.9795224143265551e-9, 3.8200553632053111e-9, 6.0722257296471741e-9, 8.2825705178560433e-9, 9.3519558365312030e-9, 6.8493322674709642e-9, -4.0447062113435705e-9, -3.0978976555702276e-8, -7.8697037517231573e-8, -1.2121883793397576e-7, -5.6597024435372429e-8, 1.7072157488062812e-7], [-7.8659824213468717e-13, -6.8346275885808227e-12, -1.7495943292551771e-11, -2.9247662388075779e-11, -3.5052954518766092e-11, -2.2138412475402680e-11, 3.0023875548603004e-11, 1.4617253679069542e-10, 3.2681024661133953e-10, 4.4570722790923220e-10, 4.3535005171920679e-11, -1.4871831850964792e-9, -2.4747550740497809e-9, 1.6578866140295622e-9], [7.5078881035937053e-15, 6.1722654300515686e-14, 1.3771544009631371e-13, 1.6557138767240980e-13, 3.3887930122586996e-14, -3.9143905722063119e-13, -1.1624712853854690e-12, -1.9137004707519584e-12, -1.1338786010241731e-12, 4.2287220097905759e-12, 1.3528182095565527e-11, 3.1193382768805103e-12, -4.5987074853926655e-11, 4.5581753740978961e-12], [-7.0459665465391972e-17, -5.3354145062602363e-16, -9.3359301574735965e-16, -3.0690225779104445e-16, 2.3672629506983669e-15, 6.9885168715119000e-15, 9.5860596850537873e-15, -1.5718428571068047e-15, -4.1741497512047785e-14, -8.0966325233694015e-14, 6.2871805194250415e-14, 3.8018786276163665e-13, -4.5006568614734410e-13, -3.2984404562412437e-13], [6.3909208230113507e-19, 4.2735290034667941e-18, 4.3865763833538629e-18, -9.1360879900098128e-18, -3.7972092926214342e-17, -5.3306502178627502e-17, 2.6120141404144724e-17, 2.7886781595455665e-16, 4.2962335256592079e-16, -7.1002283076749015e-16, -2.6787767809694170e-15, 4.3930209128572635e-15, 1.9009766210117498e-15, -1.1883933937156653e-14], [-5.9229957359708399e-21, -3.3749575026101884e-20, -4.2520079580070596e-21, 1.5555175470281002e-19, 3.0666270943068944e-19, -9.6091951235332843e-20, -1.6244316202602108e-18, -2.5610523460009348e-18, 4.4829092150324701e-18, 1.7391610473569098e-17, -2.9199283174533949e-17, -4.2268272287935308e-17, 1.7237130964399300e-16, -2.8467182411909116e-16], [4.8953198232695427e-23, 1.9920146918770774e-22, -4.1068029807536362e-22, -1.9003432752981889e-21, -1.1900179247340170e-21, 6.8748550021835322e-21, 1.5145487124404276e-20, -2.1166537584025149e-20, -1.1233390639756668e-19, 1.2022739214551978e-19, 5.1068051736024037e-19, -1.8497563060200634e-18, 3.4879522582240640e-18, -5.6232591365629173e-18], [-5.0484367911940616e-25, -1.7643341827090310e-24, 4.2299882772161516e-24, 9.7905018695167983e-24, -2.5856328793111083e-23, -1.0463881607133570e-22, 1.2974002230050351e-23, 5.9550858606899725e-22, -1.9235473241293697e-22, -4.2365379925477530e-21, 1.0086450938439732e-20, -1.3884995586753417e-20, 2.9370461143188552e-20, -9.4290964086674560e-20], [3.4317130989088313e-27, 1.1053913434409428e-28, -7.6691197747738747e-26, -6.1414624582096274e-26, 3.7874158692747042e-25, 3.6854150272854771e-25, -2.8351446814254604e-24, -3.1491701481880696e-24, 2.2848575372819268e-23, -2.1951038284629049e-23, -8.6971898572620787e-23, 3.6426936654289452e-22, -4.0666388033673265e-22, -1.2255046590059851e-21], [-1.7777543971230659e-29, 1.6829854374824524e-28, 1.0140666068597317e-27, 2.5423860031122895e-28, -2.5228898693118273e-27, 9.4887570512434247e-27, 3.7040174943747388e-26, -6.7670516949328961e-26, -1.0756659375880648e-25, 1.0774834731136940e-24, -3.1904456046375336e-24, 9.7176935014917649e-24, -1.9006520743360656e-23, -5.7705166201363811e-24]],
        [[1.6145909987021178e-3, 1.4726830934419335e-2, 4.2037214243793114e-2, 8.5941580794712525e-2, 1.5068105628205639e-1, 2.4341965628758332e-1, 3.7640772159201372e-1, 5.7156491135838657e-1, 8.7107630541483869e-1, 1.3650413760177117e+0, 2.2767332909519877e+0, 4.2982904113553215e+0, 10.571790509332606e+0, 55.397372192030173e+0], [-5.1640654825066729e-5, -4.7434315626129891e-4, -1.3733996486192449e-3, -2.8695753824178327e-3, -5.1834965734155518e-3, -8.7032992671164712e-3, -1.4124587249835912e-2, -2.2756051840173686e-2, -3.7245575898262320e-2, -6.3514899249743707e-2, -1.1679524703556533e-1, -2.4541240805607945e-1, -6.7019905363507021e-1, -3.7932282849290352e+0], [6.1873196242219439e-7, 5.7007294614715570e-6, 1.6605839229384074e-5, 3.5005855139810448e-5, 6.3960159625477337e-5, 1.0884313707331550e-4, 1.7920753166590375e-4, 2.9267327848205373e-4, 4.8357373083850412e-4, 8.2398254890960841e-4, 1.4823683223902568e-3, 2.9321485248079346e-3, 7.1294568198408851e-3, 3.4903625398256745e-2], [-6.5894984762318139e-9, -6.0464407009984932e-8, -1.7459896674228372e-7, -3.6276111056895106e-7, -6.4815639322083530e-7, -1.0664333754676947e-6, -1.6685222637267194e-6, -2.5182288544981761e-6, -3.6658334915191927e-6, -5.0359091248748582e-6, -6.0565854517778200e-6, -4.7525623135884482e-6, 2.8634116782924312e-6, 1.6555959751818077e-5], [6.5607499989757152e-11, 5.9328763897127877e-10, 1.6606188543737123e-9, 3.2739925704498956e-9, 5.3840010027294035e-9, 7.7607033069407415e-9, 9.6954554533080767e-9, 9.3147625770507362e-9, 2.1332464952549619e-9, -2.1244293224134760e-8, -7.4490585366237282e-8, -1.4927739927306791e-7, -1.1808623309509847e-7, 2.0395655641098558e-7], [-6.2795695238205345e-13, -5.5181721278495872e-12, -1.4488844962156128e-11, -2.5405434575199202e-11, -3.3571727906527657e-11, -2.9379079500162837e-11, 5.3900641109134829e-12, 1.0063415329349539e-10, 2.8724358269352814e-10, 5.1802687715063717e-10, 3.7883931217060238e-10, -1.2706301645248740e-9, -3.7160426290878550e-9, 1.6022411662374714e-9], [5.7917322627871197e-15, 4.8525475219204167e-14, 1.1349623649861799e-13, 1.5362706294925046e-13, 8.4742596407735944e-14, -2.1983385143447993e-13, -8.9032162239064571e-13, -1.8475226590857697e-12, -2.0920956220153857e-12, 1.7421483732191586e-12, 1.3963149215467652e-11, 1.5397017158242681e-11, -5.6600170054604513e-11, -1.1903779341261107e-11], [-5.3083027748771537e-17, -4.1484019527913760e-16, -7.9853331084588254e-16, -5.2353168369672760e-16, 1.3176927084307224e-15, 5.2718179915888428e-15, 9.6021792309542905e-15, 5.7615613221876492e-15, -2.6276805202365931e-14, -9.3116110338821409e-14, -3.4953741978151022e-14, 4.8132514432364288e-13, -2.6100129270311360e-13, -9.2667754838399032e-13], [4.5619533488030700e-19, 3.1836572185901305e-18, 3.9746069816415439e-18, -4.8070249527744214e-18, -2.8015818450375134e-17, -5.2863761905171723e-17, -2.1626142833162156e-17, 1.7727440194512379e-16, 5.1085190351607657e-16, -4.3595059837037146e-17, -3.2705623477573091e-15, 1.4524882382296474e-15, 1.0846869934502711e-14, -2.7339795227453700e-14], [-4.3604809074526384e-21, -2.7275834448689564e-20, -1.7782067024123351e-20, 8.7528412681151381e-20, 2.4154477686833836e-19, 9.4030574979051371e-20, -1.0395434684351417e-18, -2.9363157307953249e-18, 1.1878831881392273e-19, 1.8368738963893182e-17, -1.6677505883439121e-18, -1.2152693357498170e-16, 3.2782483221718138e-16, -6.0986411564653423e-16], [3.0478317236182280e-23, 1.2807224796073157e-22, -2.7783368264726791e-22, -1.5048898061157703e-21, -1.9289051021876184e-21, 2.8678627598193163e-21, 1.3508643459057084e-20, 1.0122585286494120e-21, -9.9136011004206154e-20, -6.8871144599305097e-20, 8.1053021734550201e-19, -1.8989011420860318e-18, 3.9237853873275871e-18, -1.1026632619824848e-17], [-3.2029842176861774e-25, -1.2290426279287813e-24, 2.7010754885212451e-24, 9.5276836180003856e-24, -6.4981334074252394e-24, -7.1547801430648253e-23, -6.6866038852072874e-23, 4.0977268559934471e-22, 7.3178074495007906e-22, -3.8951479245798813e-21, 2.5838140351779317e-21, 1.5384065747118818e-20, -2.0780887780772256e-20, -1.4562753756272144e-19], [5.3749874181095202e-27, 3.1290280500006465e-26, 3.8514189718756607e-26, 1.1318993237446694e-25, 5.4488403295372784e-25, 1.1390137221656126e-24, -2.3530210697581359e-25, -3.4764946828685547e-24, 1.5500179620837479e-23, 3.5804816963060643e-23, -2.0474417428733342e-22, 8.2291814554818420e-22, -1.8067914672920417e-21, -4.3133634810174423e-22], [1.1227401203799830e-28, 1.2272386579933615e-27, 3.9845364322713306e-27, 7.5520471817183249e-27, 1.1063661501309659e-26, 2.4430571457034609e-26, 6.6962007162025461e-26, 6.0786916690370412e-26, -1.2620557383853848e-25, 1.0393003514126964e-24, -7.9722192926103428e-25, 5.8665827488412155e-24, -3.2764539821896302e-23, 5.1668020004594649e-23]],
        [[1.5160211406796224e-3, 1.3821561439596506e-2, 3.9416931803865988e-2, 8.0469295903103905e-2, 1.4080211504455815e-1, 2.2684473796951905e-1, 3.4953066594962502e-1, 5.2830038081223638e-1, 8.0031512735312737e-1, 1.2444085201430381e+0, 2.0547577436060102e+0, 3.8307123477837595e+0, 9.2885101627006521e+0, 48.090814421832374e+0], [-4.6990157634157520e-5, -4.3148623318718908e-4, -1.2485030950838264e-3, -2.6060878892563371e-3, -4.7015126108823041e-3, -7.8816783445267429e-3, -1.2768377804498249e-2, -2.0532869355377325e-2, -3.3551948037666875e-2, -5.7169743169989449e-2, -1.0524658637767076e-1, -2.2222572427723829e-1, -6.1306421162607339e-1, -3.5131468369576182e+0], [5.4556500014670125e-7, 5.0286648517690666e-6, 1.4660967641978248e-5, 3.0950892136196087e-5, 5.6677377717643034e-5, 9.6770774267210680e-5, 1.6011607043884832e-4, 2.6340753896143548e-4, 4.3996866044216988e-4, 7.6185903145562940e-4, 1.4028457965753232e-3, 2.8600261927892044e-3, 7.1497850490917952e-3, 3.5122854923973356e-2], [-5.6331766218284777e-9, -5.1795188558943766e-8, -1.5020663291452245e-7, -3.1424703264384560e-7, -5.6726252983272104e-7, -9.4720264326095919e-7, -1.5136039471239162e-6, -2.3554352169787266e-6, -3.5886877923991854e-6, -5.2915434791101438e-6, -7.1701566023543772e-6, -7.3196036775759438e-6, 3.0402915520397820e-7, 2.0049207979807982e-5], [5.4325922970769231e-11, 4.9368522108607292e-10, 1.3963414881090737e-9, 2.8014880861157189e-9, 4.7354017758705978e-9, 7.1313458823456800e-9, 9.6108195318164745e-9, 1.0900009546584084e-8, 7.3258890187825017e-9, -1.0675143306165667e-8, -6.3702451008342916e-8, -1.6989484758157852e-7, -2.0633038695725555e-7, 2.3043367202470780e-7], [-5.0527889138853289e-13, -4.4823088499224665e-12, -1.2019531623754025e-11, -2.1909154676800695e-11, -3.1188967530956729e-11, -3.3071128666351731e-11, -1.2860511821290410e-11, 5.8773951635815121e-11, 2.3002990025561488e-10, 5.2897816165338294e-10, 6.9055459485427580e-10, -7.3864477618799459e-10, -5.1110091898919866e-9, 8.8268648436186638e-10], [4.4877288310285548e-15, 3.8195225602069901e-14, 9.2808057534919521e-14, 1.3721101818763162e-13, 1.1028745698375517e-13, -9.5269177135358659e-14, -6.3606354184037813e-13, -1.6224232274220013e-12, -2.6033723524788976e-12, -7.9077298288021220e-13, 1.1555246696519522e-11, 2.8773843454122555e-11, -5.7077586964363877e-11, -5.4078605291729377e-11], [-4.0783057527206679e-17, -3.2775331361176685e-16, -6.8343224311177647e-16, -6.3757208526522271e-16, 5.4543459875455119e-16, 3.6515038833635361e-15, 8.4102570185871051e-15, 9.7837861317095851e-15, -1.0551151807120060e-14, -8.4759956427040476e-14, -1.3426734072246108e-13, 4.4519614806769819e-13, 3.0165411323933910e-13, -2.2503155673569751e-12], [3.1865891599851267e-19, 2.2870255845205729e-18, 3.1746354079895274e-18, -2.6109752881672477e-18, -2.0687761068837909e-17, -4.7985585402071917e-17, -4.9960991644871457e-17, 7.6309561295245529e-17, 4.5336763040584586e-16, 5.3271966421399127e-16, -2.7461084675221211e-15, -4.0156257453725107e-15, 2.4976720975244055e-14, -5.8731990016201924e-14], [-3.3186351702875866e-21, -2.2496860490530264e-20, -2.5042632211565434e-20, 3.9145697489452491e-20, 1.6922433092070889e-19, 1.6754816435429268e-19, -5.4726230998957448e-19, -2.5678240958656261e-18, -3.0012345835815383e-18, 1.2869491064398032e-17, 3.0138298864704616e-17, -1.7171411298695764e-16, 4.3501109909646438e-16, -1.1704212272736965e-15], [2.5088177941277350e-23, 1.3798661710766941e-22, -2.1291090605609332e-23, -7.7452184940309706e-22, -1.3370747752759409e-21, 1.5125262095749164e-21, 1.1754720959637638e-20, 1.7125251827575539e-20, -5.2149875811057204e-20, -1.8529075238960939e-19, 7.1200536113280247e-19, -3.0640587355250326e-19, 5.2218935873584310e-19, -1.6282829281162948e-17], [1.6535659793578827e-25, 2.5692725098693053e-24, 1.1689959726771495e-23, 2.9179834665728658e-23, 4.2432415630279209e-23, 2.6439279083657420e-23, 2.3996112173593719e-23, 3.7527103664960595e-22, 1.3866643728602747e-21, -1.0612452257636008e-21, -6.5589455902034599e-21, 5.6449545786491717e-20, -1.4533577757870806e-19, -3.9330574316339359e-20], [1.6666932587268449e-26, 1.4286160412157774e-25, 3.8087576558573459e-25, 8.0335836554833350e-25, 1.6754200923597603e-24, 3.2054036470390893e-24, 4.3761450167294459e-24, 3.0657916075051498e-24, 1.3338405481164524e-23, 7.7605023686677629e-23, -1.4231637913167133e-22, 7.4458122663075104e-22, -3.2007497256157475e-21, 6.4822637916207124e-21], [3.1520539841819257e-28, 3.0033519426975301e-27, 8.9920986773974031e-27, 1.8470670970882349e-26, 3.1336823293414505e-26, 5.3388415649132605e-26, 1.0590784466395675e-25, 1.7588510359456698e-25, 4.4544045263039716e-26, 4.9604294964553424e-25, 3.0325765063964041e-24, -1.0582037125900924e-23, -1.0857528089776467e-23, 2.3914468901513455e-22]],
        [[1.4262012318073581e-3, 1.2996940565866656e-2, 3.7031762032787452e-2, 7.5493302520587504e-2, 1.3183183141529603e-1, 2.1182088944476660e-1, 3.2521915118529553e-1, 4.8925453920278827e-1, 7.3659623335871394e-1, 1.1359613012432174e+0, 1.8552033897251197e+0, 3.4088297694847149e+0, 8.1195465447095006e+0, 41.346310221204174e+0], [-4.2881985311725312e-5, -3.9361530548187548e-4, -1.1380629823608570e-3, -2.3728347752085768e-3, -4.2740806136102749e-3, -7.1510890662530742e-3, -1.1557512640653647e-2, -1.8535629061324441e-2, -3.0202135920381606e-2, -5.1330975144796055e-2, -9.4384174071016171e-2, -1.9974392635129161e-1, -5.5591569049682972e-1, -3.2311381978398933e+0], [4.8286662750446940e-7, 4.4517111956766684e-6, 1.2984978657015615e-5, 2.7434973177827439e-5, 5.0304718165476588e-5, 8.6066810024394513e-5, 1.4286449757871792e-4, 2.3622091913217180e-4, 3.9774830888440046e-4, 6.9767937089510528e-4, 1.3111891665010404e-3, 2.7555258706273779e-3, 7.1300234802334317e-3, 3.5385852287236867e-2], [-4.8393233435853454e-9, -4.4566568439779461e-8, -1.2967358268657717e-7, -2.7275598922717534e-7, -4.9633860532856315e-7, -8.3848500388318967e-7, -1.3626413283355906e-6, -2.1736498065413563e-6, -3.4381359292942946e-6, -5.3795077216070554e-6, -8.0652812726782555e-6, -1.0114679242506504e-5, -3.8847671060832731e-6, 2.3781071649381722e-5], [4.5210417948208485e-11, 4.1250228183485745e-10, 1.1767306366757362e-9, 2.3947458190961300e-9, 4.1389647677038969e-9, 6.4544690767616688e-9, 9.2190297985850957e-9, 1.1709380223445935e-8, 1.1285754260405166e-8, -4.6601899271767941e-10, -4.7469018130724514e-8, -1.7685148868702880e-7, -3.2103749019993687e-7, 2.2872576175888390e-7], [-4.1022705423938640e-13, -3.6681808684467104e-12, -1.0011099016384751e-11, -1.8838590568662383e-11, -2.8428229324998380e-11, -3.4298096350645743e-11, -2.5495678094465342e-11, 2.3319259410496286e-11, 1.6553209646046825e-10, 4.8382252115106094e-10, 9.1401996531234025e-10, 8.1326883286898129e-11, -6.2749453399576681e-9, -1.4270608220294818e-9], [3.4721451478407313e-15, 2.9930537529889425e-14, 7.4965200048312113e-14, 1.1837701248961286e-13, 1.1716292293492922e-13, -1.3506323929676078e-14, -4.2524009536674559e-13, -1.3270394324097994e-12, -2.7140604929631138e-12, -2.8661361400607022e-12, 6.7640493719248556e-12, 3.8524953787840318e-11, -3.5144496482241454e-11, -1.5061362694232415e-10], [-3.2273021316359574e-17, -2.6609597484208253e-16, -5.9503456657777205e-16, -7.0122003579541350e-16, -2.4109731314323426e-17, 2.2295458310487413e-15, 6.5935894060114455e-15, 1.0915065195132838e-14, 1.9563389768948760e-15, -6.1753481064093479e-14, -1.9994586508945812e-13, 2.2080803166704160e-13, 1.3402850622585378e-12, -4.9253974895006923e-12], [2.2159529086922548e-19, 1.6263443964903311e-18, 2.4433337910439557e-18, -1.3207353508224456e-18, -1.4848988840756860e-17, -4.0098577533647823e-17, -6.0239498628568136e-17, 8.1239392828345092e-19, 3.2426977643607572e-16, 8.6181175150105023e-16, -1.2317236409503068e-15, -9.7427354453362290e-15, 3.9061235341620698e-14, -1.1178627606038747e-13], [-1.8735330826598865e-21, -1.2123788348909951e-20, -8.5172469005590564e-21, 4.8699927649756927e-20, 1.8269683381436071e-19, 3.0652578836677333e-19, 2.4973081806622972e-20, -1.4768468945641399e-18, -3.6685136470564592e-18, 5.6783896567353104e-18, 5.1471590205732973e-17, -1.2649536928990982e-16, 2.8338529033493231e-16, -1.7105348813440539e-15], [5.5928222580687989e-23, 4.5836757467404767e-22, 1.0630972611066702e-21, 1.7018466914059216e-21, 2.8814698161641417e-21, 7.0276512352595518e-21, 1.9282836912541046e-20, 4.0026729662399883e-20, 2.3896320360315498e-20, -1.4521322052892927e-19, 3.3698816771724071e-19, 2.6769844094781361e-18, -9.1197286244438861e-18, -5.5665373528044566e-18], [1.3615773683953760e-24, 1.3172676679988640e-23, 4.1082937650210742e-23, 9.0474861736400600e-23, 1.6115549164533610e-22, 2.4327502519918596e-22, 3.5363370107493486e-22, 7.2716278701923977e-22, 2.0817296587509677e-21, 2.8791110262672781e-21, -8.9853291283942331e-21, 7.0774653543777307e-20, -2.8106560463438291e-19, 6.7838654812433621e-19], [3.1691095795568603e-26, 2.8461466145609365e-25, 7.9971244765962829e-25, 1.6545111650252549e-24, 3.0883912891483740e-24, 5.4692873788117770e-24, 8.6164574265218662e-24, 1.0401338167673869e-23, 1.4177484820834246e-23, 7.6281096911329271e-23, 4.0993334546207968e-23, -3.0059442376762274e-22, -1.6529550079672956e-21, 2.5449780770747000e-20], [1.2526820634620914e-28, 1.1820975013722770e-27, 3.4164579728990495e-27, 6.3712069274137440e-27, 8.3924939554200393e-27, 8.7308871101560955e-27, 1.5250371714147632e-26, 3.0302063174594600e-26, -1.3608707092616694e-25, -7.1046390846014765e-25, 2.9550202099716754e-24, -2.7893975556653097e-23, 8.1036963505619301e-23, 4.6312220274262970e-22]],
        [[1.3441245869005968e-3, 1.2243705792078290e-2, 3.4854804585592768e-2, 7.0957189554231910e-2, 1.2366801388487545e-1, 1.9817658823985352e-1, 3.0319700393275537e-1, 4.5399271453993697e-1, 6.7924561717380592e-1, 1.0386767430085803e+0, 1.6766099062072373e+0, 3.0309681022450563e+0, 7.0645396611357275e+0, 35.168065845327968e+0], [-3.9239638176646466e-5, -3.6003394480480579e-4, -1.0401020235856022e-3, -2.1658235715741830e-3, -3.8943835459898664e-3, -6.5010984028801041e-3, -1.0477537927804754e-2, -1.6746987230676747e-2, -2.7181881460475333e-2, -4.6007174860763356e-2, -8.4293268894741037e-2, -1.7823286989439509e-1, -4.9915905533604502e-1, -2.9468513846970850e+0], [4.2887805782105312e-7, 3.9542113453926233e-6, 1.1535556037517055e-5, 2.4379845071272063e-5, 4.4727725022790176e-5, 7.6601977262247052e-5, 1.2737936735767653e-4, 2.1127129017271545e-4, 3.5767199559457334e-4, 6.3338628994281380e-4, 1.2104752455395259e-3, 2.6173924990323199e-3, 7.0483379468168464e-3, 3.5691457548191025e-2], [-4.1773587511491492e-9, -3.8516842549130601e-8, -1.1235541946736431e-7, -2.3730660146691860e-7, -4.3451201214841280e-7, -7.4070003540081512e-7, -1.2197117513604741e-6, -1.9841956439362150e-6, -3.2345796020786782e-6, -5.3138196092990674e-6, -8.6716829694303820e-6, -1.2879631438344747e-5, -1.0055794794987245e-5, 2.6961062398640457e-5], [3.7769940215519641e-11, 3.4574773379551328e-10, 9.9319661199749640e-10, 2.0447787233688989e-9, 3.5982170353962351e-9, 5.7696251279684022e-9, 8.6209128417339498e-9, 1.1881883724930060e-8, 1.3955039661564912e-8, 8.3992859326710721e-9, -2.8034197479862231e-8, -1.6567494263663762e-7, -4.5117247596280806e-7, 1.5053631472302897e-7], [-3.3698150328288502e-13, -3.0336195890591734e-12, -8.4029205357028221e-12, -1.6235619641156980e-11, -2.5670850133473428e-11, -3.4005378640121695e-11, -3.3696781497221411e-11, -4.8956568053689132e-12, 1.0211373273094134e-10, 3.9755842394448043e-10, 1.0065083491728350e-9, 1.0415616340388189e-9, -6.5205369309389415e-9, -7.1574824318109597e-9], [2.6615246802052589e-15, 2.3175819495813419e-14, 5.9435073038342381e-14, 9.8560357482774073e-14, 1.1107588597682342e-13, 3.3146077711139650e-14, -2.6619908415693505e-13, -1.0264387359160940e-12, -2.5314599945150999e-12, -4.1846823659216947e-12, 9.0663390580905692e-13, 3.9838672628336935e-11, 2.0770819985539514e-11, -3.4770984663065951e-10], [-2.5685437768020999e-17, -2.1612369572148855e-16, -5.0933640119378340e-16, -6.9311891868757270e-16, -3.5536284263984168e-16, 1.2026412074973878e-15, 4.8666761407778964e-15, 1.0470444582887679e-14, 1.0593635232784326e-14, -3.1721087521961076e-14, -2.0783306360793393e-13, -1.3753652095619684e-13, 2.6582277772005970e-12, -9.4474106273486271e-12], [2.1288829942764764e-19, 1.6958334456648697e-18, 3.4394671837032998e-18, 2.8262541894802153e-18, -4.1026416742993012e-18, -2.0748943701874427e-17, -4.0648256233911335e-17, -1.4564418043273326e-17, 2.3293737249413160e-16, 1.0005963358327469e-15, 7.7685625025743776e-16, -1.1696801667387809e-14, 3.9641178868284018e-14, -1.6628332158280431e-13], [1.9969596621051118e-21, 2.1710795819877305e-20, 8.1113321718191893e-20, 2.1886748339637527e-19, 4.8111920722086322e-19, 8.7387848866916107e-19, 1.2203195404090066e-18, 8.9681969905939557e-19, -7.3627370115660361e-19, 3.2746706686815940e-18, 5.7996269613349837e-17, 3.3238654045124977e-17, -3.3279065008412297e-16, -8.9304748747822176e-16], [1.4697661487415204e-22, 1.3172886965935805e-21, 3.6517074114638316e-21, 7.2785338848070339e-21, 1.2892656411497731e-20, 2.2803070651168129e-20, 4.2719702919462728e-20, 8.1020287482839911e-20, 1.2404080905144318e-19, 3.9608146975957142e-20, 1.6852869763175139e-20, 4.9398156101784020e-18, -2.1225993553341369e-17, 5.9242209804886784e-17], [2.5892084785261091e-24, 2.4138918339106502e-23, 7.1483195948225349e-23, 1.5183935471509495e-22, 2.7197119972124554e-22, 4.3331890724324727e-22, 6.4217157054994525e-22, 1.0210338966959587e-21, 2.2157055517235896e-21, 4.7843671993750224e-21, -5.4579423076359143e-21, 2.0139270149026124e-20, -2.1375703908074405e-19, 2.4192240346253854e-18], [6.6783097734761899e-27, 5.4208013956053479e-26, 1.2167044066802664e-25, 1.7284280516637463e-25, 1.9347625100333542e-25, 1.5360203691037403e-25, -4.8010773397123974e-25, -4.6419147349755355e-24, -1.8728917886147421e-23, -1.7309726464773932e-23, 5.0676563390917117e-23, -1.7765581522183930e-21, 5.2324859060015152e-21, 4.3445300897648378e-20], [-1.3585302927804965e-27, -1.2527505605362278e-26, -3.6654238832669887e-26, -7.8239337274234982e-26, -1.4637835308045395e-25, -2.5704818477238110e-25, -4.3405538665741745e-25, -7.1791278390490457e-25, -1.3022977870490092e-24, -3.0556772837560661e-24, -3.3355518349875074e-24, -2.3986650125118838e-23, 1.6677474463767401e-22, 1.8441104914932326e-23]],
        [[1.2689245230481386e-3, 1.1553871414824051e-2, 3.2862798057904657e-2, 6.6811940356840674e-2, 1.1622122285439649e-1, 1.8576013455461565e-1, 2.8321623413522228e-1, 4.2211578220523971e-1, 6.2762308471230811e-1, 9.5152954639482473e-1, 1.5173732714061457e+0, 2.6949215173398574e+0, 6.1221331684069962e+0, 29.560938833713078e+0], [-3.5999344327289229e-5, -3.3015944357923145e-4, -9.5295277785741787e-4, -1.9816432228213733e-3, -3.5564777030621290e-3, -5.9223182029458702e-3, -9.5147575175926058e-3, -1.5148842072144314e-2, -2.4471835217202678e-2, -4.1192295670009705e-2, -7.5031804972975038e-2, -1.5795510460902275e-1, -4.4338734863588122e-1, -2.6599989637734378e+0], [3.8216386950908464e-7, 3.5232913949060530e-6, 1.0277330392287784e-5, 2.1718148082377063e-5, 3.9842526776006665e-5, 6.8245186293213879e-5, 1.1354719128763033e-4, 1.8859430785640359e-4, 3.2025373845482359e-4, 5.7067083352192793e-4, 1.1043866614303870e-3, 2.4477824853046252e-3, 6.8802149559427000e-3, 3.6022976910060660e-2], [-3.6237155033693755e-9, -3.3441970625216423e-8, -9.7735817108439624e-8, -2.0706561747215728e-7, -3.8090643820626317e-7, -6.5377313094140528e-7, -1.0874714220998106e-6, -1.7961079365777340e-6, -2.9981457316914755e-6, -5.1215138230713650e-6, -8.9599099116887706e-6, -1.5313873636907558e-5, -1.8263072195364402e-5, 2.7670100899178263e-5], [3.1615247179409816e-11, 2.9018361439162882e-10, 8.3832732429283068e-10, 1.7422408732706347e-9, 3.1106583095895777e-9, 5.0999616152169990e-9, 7.8935868526158983e-9, 1.1561314665229614e-8, 1.5418178093745662e-8, 1.5293419486866296e-8, -8.1351188005915404e-9, -1.3580324269031547e-7, -5.6989803561318435e-7, -1.0064589298185684e-7], [-2.8085298047708239e-13, -2.5427489699703424e-12, -7.1313233157568955e-12, -1.4083234093689483e-11, -2.3119140295115366e-11, -3.2844558952648188e-11, -3.8543652464225526e-11, -2.6010577995987372e-11, 4.5774464596542890e-11, 2.9021533276886185e-10, 9.6316729601747977e-10, 1.9116637935994590e-9, -5.0028144265384594e-9, -1.9285667701916000e-8], [2.0578670421370612e-15, 1.8085843852299391e-14, 4.7389171034543449e-14, 8.2077576066486069e-14, 1.0273170928138242e-13, 6.3715486012015723e-14, -1.3888585929553182e-13, -7.3001662178064239e-13, -2.1266627693685935e-12, -4.6025011896472440e-12, -4.2525088054735564e-12, 3.1201230121647952e-11, 1.0991164706442992e-10, -6.8692396953791227e-10], [-1.6372696540791819e-17, -1.3717932882237447e-16, -3.1845793163135046e-16, -4.0795468641509207e-16, -8.7809675210035541e-17, 1.2530751422096413e-15, 4.6494418472004790e-15, 1.1223710266307873e-14, 1.8744239696922246e-14, 2.8609672106611628e-15, -1.4989847082193588e-13, -4.5447831870140241e-13, 3.5584599373458632e-12, -1.4582103482681300e-11], [4.1648738559018139e-19, 3.6664227333511978e-18, 9.6970713916281598e-18, 1.7439549264159278e-17, 2.5151722879021290e-17, 3.1296042033266361e-17, 4.0039681818002573e-17, 8.5053522851385750e-17, 3.1466406836174966e-16, 1.1907324703507128e-15, 2.8191888593041935e-15, -6.9857928169771595e-15, 1.1005495707370775e-14, -1.2486322047045960e-13], [9.9034145559355035e-21, 9.3227445246157317e-20, 2.8251716584670762e-19, 6.2635948846036512e-19, 1.2023826792018768e-18, 2.1061528409591726e-18, 3.3815121945798986e-18, 4.7966939185672381e-18, 5.6069760414840609e-18, 8.1611912308835205e-18, 5.3684602495692782e-17, 2.1990730282203841e-16, -1.2663687641035410e-15, 4.1643060600042432e-15], [2.3140104196555337e-22, 2.0999325819912314e-21, 5.9434613964779402e-21, 1.2060879984170432e-20, 2.1216555299916273e-20, 3.5374638495980029e-20, 5.9362669069983463e-20, 1.0285457067785521e-19, 1.7023671726758922e-19, 1.6402127754332741e-19, -2.6482125921639381e-19, 3.6235775114439433e-18, -2.2242767583327189e-17, 2.0441631227981763e-16], [1.5390808236587044e-25, 1.3646240531015034e-24, 3.3892154503981471e-24, 3.7587478187708599e-24, -6.8953210415939078e-24, -5.5850915286094973e-23, -2.0602620015222889e-22, -5.4816330294396028e-22, -9.8822268380591057e-22, -8.8519803243956097e-22, -1.0136953853260415e-20, -8.4297453689224764e-20, 2.2161285732541646e-19, 3.8094976990457695e-18], [-1.3098261261431653e-25, -1.2124694280407902e-24, -3.5621158283238010e-24, -7.5915473630477965e-24, -1.4034151837104794e-23, -2.4185431803793030e-23, -4.0627969110178255e-23, -6.9653741664047173e-23, -1.2767824101373275e-22, -2.3595939444681928e-22, -2.9408261861184912e-22, -2.3030862898567269e-21, 1.1763895829385471e-20, -4.8286590651901023e-21], [-3.9479213124874786e-27, -3.6260576110761784e-26, -1.0501676288090116e-25, -2.1966758817442708e-25, -3.9772050971014516e-25, -6.6949847434643554e-25, -1.0846112821700259e-24, -1.7207560412772269e-24, -2.7465366691074155e-24, -4.9422678899176842e-24, -8.7250130264669898e-24, 7.1543968242815369e-24, 3.3266826943689905e-23, -2.2092558885221527e-21]],
        [[1.1998512434574029e-3, 1.0920521324580678e-2, 3.1035551243027115e-2, 6.3014851430790165e-2, 1.0941310784958286e-1, 1.7443756292547054e-1, 2.6505524906659536e-1, 3.9326079057803959e-1, 5.8113051005124020e-1, 8.7351890704843649e-1, 1.3758036548031906e+0, 2.3979876345717222e+0, 5.2895924503553468e+0, 24.530133436482923e+0], [-3.3107782477665517e-5, -3.0350311418174743e-4, -8.7520787906111493e-4, -1.8173840230861900e-3, -3.2552091651304732e-3, -5.4063999463609801e-3, -8.6564910871122056e-3, -1.3723201272577934e-2, -2.2049470021441714e-2, -3.6868199257148194e-2, -6.6627578385756923e-2, -1.3914170205246536e-1, -3.8938377277737936e-1, -2.3705502073289060e+0], [3.4153732644856459e-7, 3.1482406584861584e-6, 9.1804670379858999e-6, 1.9391660323923617e-5, 3.5555450906855701e-5, 6.0868136402990299e-5, 1.0122942376067598e-4, 1.6813095851443490e-4, 2.8577790583411924e-4, 5.1085320637507531e-4, 9.9670108932611497e-4, 2.2523596876950584e-3, 6.6036032839553499e-3, 3.6329332250959384e-2], [-3.1602485075155239e-9, -2.9183310835597327e-8, -8.5404060961816310e-8, -1.8133850233401335e-7, -3.3469963735467472e-7, -5.7733083507653910e-7, -9.6747366351875806e-7, -1.6161258486106489e-6, -2.7467024019622949e-6, -4.8362777402492391e-6, -8.9427319999839068e-6, -1.7144852165676275e-5, -2.8004568558166466e-5, 2.1933756342175888e-5], [2.6464350103217678e-11, 2.4344184633005250e-10, 7.0657889734063547e-10, 1.4797756292406348e-9, 2.6733922390256172e-9, 4.4621201532991906e-9, 7.1012077914314772e-9, 1.0893716990083564e-8, 1.5872609866855387e-8, 2.0023165568468562e-8, 9.8275664791222210e-9, -9.1208975293977372e-8, -6.3549832921186812e-7, -6.8580818089601635e-7], [-2.3506826067531735e-13, -2.1378627181402176e-12, -6.0549429816717019e-12, -1.2163355521202097e-11, -2.0546562497235344e-11, -3.0701938462765116e-11, -4.0042247318456830e-11, -3.9266761560306060e-11, 2.3995389582396275e-12, 1.8533291653577182e-10, 8.2262091975736239e-10, 2.4906288337310999e-9, -1.1771047957299116e-9, -4.0920236221010015e-8], [1.8517468106396827e-15, 1.6501890787935177e-14, 4.4655996600455481e-14, 8.2484187686816956e-14, 1.1914061921910356e-13, 1.2601647467235467e-13, 3.0495956921445985e-14, -3.4664858438020768e-13, -1.4222539552179611e-12, -3.9373301782357717e-12, -6.9172581094222345e-12, 1.6684596672258186e-11, 2.0656022666039591e-10, -1.1155803096536392e-9], [4.3161005448613069e-18, 4.8854552779960135e-17, 1.9689047118885459e-16, 5.9613355973491620e-16, 1.5577504463370061e-15, 3.7101755771819520e-15, 8.2760554547223796e-15, 1.7382776752583113e-14, 3.3143164209298354e-14, 4.6619083170967971e-14, -3.1992128931200800e-14, -5.3248623048244931e-13, 3.0384061558005151e-12, -1.4297581679906565e-11], [9.1859035336989761e-19, 8.3397360893924854e-18, 2.3570575432763459e-17, 4.7414351212295019e-17, 8.1256290807005436e-17, 1.2791667508720841e-16, 1.9555175394028307e-16, 3.1458387273532436e-16, 6.0838176839604200e-16, 1.5563351724329381e-15, 4.4043415214424378e-15, 2.3687533263630578e-15, -4.6764837000846695e-14, 2.0824753054133162e-13], [1.6647128670667845e-20, 1.5398161099833008e-19, 4.5178254597754410e-19, 9.6083424228692553e-19, 1.7675040084355630e-18, 2.9981196582526297e-18, 4.7889704435894597e-18, 7.1134423116125806e-18, 9.2283300039031447e-18, 9.7292063671344413e-18, 2.8477659488036026e-17, 2.6095606437736697e-16, -1.8008934075752674e-15, 1.5095832908255275e-14], [1.9949137666562530e-23, 1.4675235026068220e-22, 2.1529629276463330e-22, -1.9259093489194168e-22, -1.8149710603109171e-21, -5.7904669342921370e-21, -1.3635942994546102e-20, -2.7549927066652286e-20, -5.8593647419699138e-20, -2.0935384586455054e-19, -1.1694681729442359e-18, -2.2023459817336236e-18, -9.7599059725140933e-19, 3.1177050460971339e-16], [-1.1639396979189560e-23, -1.0730413074121644e-22, -3.1311880610361963e-22, -6.6283682979488062e-22, -1.2218211872811924e-21, -2.1143707134422044e-21, -3.5817856437139606e-21, -6.0928898819670210e-21, -1.0468851015670238e-20, -1.7730990885667083e-20, -3.3701633657701451e-20, -1.6938157674513275e-19, 6.8876927544406256e-19, -4.7620741811789556e-19], [-3.6163643418352564e-25, -3.3239537272663114e-24, -9.6338879475834885e-24, -2.0144730362701415e-23, -3.6372483975123644e-23, -6.0889260799547825e-23, -9.8178470453603530e-23, -1.5686476403664632e-22, -2.5618707006835142e-22, -4.3531537738334180e-22, -6.2006130610092926e-22, -9.0834338269425630e-22, 4.6870825321055558e-21, -1.9720121201005908e-19], [-3.9577693076385384e-27, -3.6037465820902557e-26, -1.0246529793397789e-25, -2.0795655360596855e-25, -3.5987223128981012e-25, -5.6754045623492040e-25, -8.3697877212074028e-25, -1.1471999571679211e-24, -1.3772377699343648e-24, -1.2880624539310510e-24, -7.5982586535461718e-25, 4.5526211349142045e-23, -3.0475671535461167e-22, -4.7825282392887627e-21]],
        [[1.1362527434509853e-3, 1.0337636745272423e-2, 2.9355463711031774e-2, 5.9528598198933089e-2, 1.0317490793888369e-1, 1.6409059631789957e-1, 2.4851666202869998e-1, 3.6710007387354653e-1, 5.3921646197803318e-1, 8.0368956636757294e-1, 1.2501849569672258e+0, 2.1370566613415529e+0, 4.5624675431899522e+0, 20.080322167841917e+0], [-3.0520318636088903e-5, -2.7965487666319907e-4, -8.0568015722393604e-4, -1.6705702370419676e-3, -2.9861341015652992e-3, -4.9459984244424087e-3, -7.8912230605990691e-3, -1.2452826261783499e-2, -1.9890777802370641e-2, -3.3007817661328939e-2, -5.9079356245921648e-2, -1.2196668336999243e-1, -3.3807193195382823e-1, -2.0791215146720397e+0], [3.0600786996653221e-7, 2.8200727770493830e-6, 8.2196514673058501e-6, 1.7350001154080290e-5, 3.1782698265023582e-5, 5.4348918149098467e-5, 9.0275406824066545e-5, 1.4975637252082798e-4, 2.5433778892606517e-4, 4.5484724947115333e-4, 8.9084533948155011e-4, 2.0395664358143390e-3, 6.2067062970698463e-3, 3.6494656561658044e-2], [-2.7719073911190937e-9, -2.5607709400916034e-8, -7.5005763556504903e-8, -1.5949151458941847e-7, -2.9503661272477579e-7, -5.1064003547997353e-7, -8.6012788976687406e-7, -1.4483723027839140e-6, -2.4938526665922919e-6, -4.4908398078168888e-6, -8.6629014000360757e-6, -1.8188751334503351e-5, -3.8066398678634329e-5, 2.8435498956013069e-6], [2.2236632195167843e-11, 2.0493268687394647e-10, 5.9714588613642442e-10, 1.2586727497510349e-9, 2.2963437724187319e-9, 3.8895304848342201e-9, 6.3307394782409602e-9, 1.0071416385459839e-8, 1.5666957809118220e-8, 2.2920702846481013e-8, 2.4632178230915901e-8, -3.8522074888853118e-8, -6.0369914990734655e-7, -1.7980567343407618e-6], [-1.8532606648484724e-13, -1.6903670781556387e-12, -4.8175522507265346e-12, -9.7818217657044647e-12, -1.6814871190502781e-11, -2.5875751886873706e-11, -3.5676173083019636e-11, -4.0394682112679781e-11, -1.8134136517418886e-11, 1.1234997243602288e-10, 6.6232665626957100e-10, 2.7284120859307842e-9, 4.5734737437667072e-9, -7.1161540968766972e-8], [2.4679066410263192e-15, 2.2379174004821442e-14, 6.2986590896585193e-14, 1.2518738684977131e-13, 2.0785678884313076e-13, 3.0179397017850484e-13, 3.7278675524376095e-13, 3.1427066608883467e-13, -1.8127686998628476e-13, -1.9042716852668240e-12, -5.7694513031428304e-12, 4.0406807037141618e-12, 2.6123677834375259e-10, -1.3249691461627090e-9], [4.2122138248890220e-17, 3.9328843332279297e-16, 1.1773282101491818e-15, 2.5900369179957644e-15, 5.0240346571499142e-15, 9.2491093246485900e-15, 1.6791233484169687e-14, 3.0671796328792282e-14, 5.6352530800368271e-14, 9.8517370129077024e-14, 1.1291451619642476e-13, -3.3834071813179718e-13, 5.5778636870021389e-13, 3.2252896118593422e-12], [1.3581834533922423e-18, 1.2385959134740550e-17, 3.5325207960037844e-17, 7.2036602788181528e-17, 1.2559340284971711e-16, 2.0089767123942182e-16, 3.0680524892907085e-16, 4.6520246274664709e-16, 7.5384898988552732e-16, 1.5125283933950714e-15, 4.1542788917928841e-15, 8.3343103571999559e-15, -1.0485316654677562e-13, 9.3945553353165842e-13], [1.5766860527575244e-21, 1.3793159848081389e-20, 3.5662754763928187e-20, 5.9344765040392773e-20, 6.2777606288436953e-20, -1.8139857866988592e-20, -3.7978767372303299e-19, -1.6577905540708259e-18, -5.9888290398226465e-18, -2.0230359381432962e-17, -5.6045447433518067e-17, 2.0650781131768845e-17, -1.2307023941891765e-15, 2.3520577369405016e-14], [-9.1799094764632613e-22, -8.4803895549769314e-21, -2.4834986645945486e-20, -5.2777991852822804e-20, -9.7479953830480402e-20, -1.6810702091969318e-19, -2.8102457692082768e-19, -4.6658065781517264e-19, -7.8742105366460843e-19, -1.4207972787366449e-18, -3.2176141154978826e-18, -9.6266882185210912e-18, 2.7972277316059818e-17, 2.0897379811653624e-18], [-3.1043742633070786e-23, -2.8507853600331386e-22, -8.2495294243901169e-22, -1.7220599746546685e-21, -3.1063611024134230e-21, -5.2056130296339974e-21, -8.4251573290147841e-21, -1.3507604255622868e-20, -2.1799077536842415e-20, -3.5236281338508792e-20, -5.4587210328956029e-20, -1.4244953344314072e-19, 4.8367740685589932e-19, -1.5001793716769888e-17], [-3.5309114156854979e-25, -3.2186750203044712e-24, -9.1705256880438184e-24, -1.8660634480621943e-23, -3.2376954033624361e-23, -5.1186950761874360e-23, -7.5864653407852987e-23, -1.0621782890899633e-22, -1.3876225692950775e-22, -1.5733360458300271e-22, 7.0493061268209741e-24, 2.3231352195142444e-21, -1.2625049815983560e-20, -3.6139648419284247e-19], [7.1659495126317747e-27, 6.6493201917194586e-26, 1.9647616224467402e-25, 4.2328881580773478e-25, 7.9678197026475102e-25, 1.4096760684402979e-24, 2.4404395361783151e-24, 4.2573493260680635e-24, 7.6942389091067522e-24, 1.4747815027313273e-23, 2.9292932921196496e-23, 8.0486352117104839e-23, -2.2363934393308968e-22, 7.8239816721354293e-22]],
        [[1.0775589349863871e-3, 9.7999522671910164e-3, 2.7807120589591568e-2, 5.6320429674013102e-2, 9.7446115253222557e-2, 1.5461470926269972e-1, 2.3342491657607118e-1, 3.4333933004892958e-1, 5.0137783293427478e-1, 7.4114656336761872e-1, 1.1388291830230435e+0, 1.9087440042585063e+0, 3.9344208715242891e+0, 16.213721105580445e+0], [-2.8199517311795807e-5, -2.5827008077192813e-4, -7.4336752272756853e-4, -1.5390971282896801e-3, -2.7454331952206620e-3, -4.5346961344526147e-3, -7.2086341817339818e-3, -1.1321614898707123e-2, -1.7971545259927181e-2, -2.9578205893654749e-2, -5.2360748664856393e-2, -1.0652952237750587e-1, -2.9040051291654393e-1, -1.7876357991818061e+0], [2.7476911097877665e-7, 2.5314448163255474e-6, 7.3740308069824358e-6, 1.5551086714304895e-5, 2.8452637861743736e-5, 4.8579100371187984e-5, 8.0540134165439835e-5, 1.3331829399996865e-4, 2.2590442394719380e-4, 4.0322643838167477e-4, 7.8967149353900889e-4, 1.8194135872473082e-3, 5.6960734613866979e-3, 3.6303854783789461e-2], [-2.4420683062571756e-9, -2.2565535009104770e-8, -6.6126663763249304e-8, -1.4072540255455088e-7, -2.6065873964752382e-7, -4.5205356288626007e-7, -7.6387939128884127e-7, -1.2929629273839503e-6, -2.2457387315600764e-6, -4.1075925209464269e-6, -8.1690259347020226e-6, -1.8365987757768894e-5, -4.6655129438850205e-5, -3.8937406084739909e-5], [1.9242396723128708e-11, 1.7761113994490818e-10, 5.1921602922880034e-10, 1.1002445335211922e-9, 2.0235619691150349e-9, 3.4689682978102697e-9, 5.7501044819601796e-9, 9.4164060645866540e-9, 1.5400874083472509e-8, 2.4957853002414221e-8, 3.6816258636558460e-8, 1.6396716387878895e-8, -4.5037018573031477e-7, -3.5112051780508175e-6], [-1.0730355681392780e-13, -9.7886365336081232e-13, -2.7900950952771009e-12, -5.6630772331919059e-12, -9.7159087222002141e-12, -1.4857234670036061e-11, -2.0087008464145215e-11, -2.1078048448106215e-11, -1.2885063533191231e-12, 1.0407795068683117e-10, 5.7395625321971271e-10, 2.7396149609281695e-9, 1.0619023847127125e-8, -9.7734391441378269e-8], [4.1971976866021110e-15, 3.8395713030293180e-14, 1.1016347235988047e-13, 2.2648085894013624e-13, 3.9812373325106968e-13, 6.3867670020870525e-13, 9.5846057867756096e-13, 1.3398495702111127e-12, 1.6474494592157356e-12, 1.3265256054882192e-12, -1.2531556135638433e-12, -2.1756762144775488e-12, 2.2494382542941710e-10, -6.9526555425507625e-10], [7.6517430222827508e-17, 7.0562125562252734e-16, 2.0600353015807977e-15, 4.3627312522074903e-15, 8.0407795010315224e-15, 1.3893722183361040e-14, 2.3457633482120808e-14, 3.9793541002739431e-14, 6.9031754480580468e-14, 1.2127565790123619e-13, 1.8431562042438911e-13, -1.4368945784341454e-13, -3.2604393064509847e-12, 4.5278290829330744e-11], [3.9506936263204227e-19, 3.4846323971644649e-18, 9.2256829008510474e-18, 1.6417641612163149e-17, 2.2243017965104831e-17, 2.0339286431972415e-17, -3.3702588910968341e-18, -7.8946438042865700e-17, -2.6309273566040195e-16, -6.0572441076119636e-16, -7.0626649782325650e-16, 1.0575710077656345e-15, -1.2565879021477228e-13, 1.5868023079740110e-12], [-6.5144954604229954e-20, -6.0046850176297599e-19, -1.7508649457989796e-18, -3.6981198419613375e-18, -6.7818782416810202e-18, -1.1621341136065375e-17, -1.9389839949696670e-17, -3.2497598886135800e-17, -5.6526953291698631e-17, -1.0644595066128489e-16, -2.2533244150549276e-16, -4.3988788860085855e-16, 1.2044558496973754e-16, 6.0324864895556408e-15], [-2.4010900510496972e-21, -2.2061973796517596e-20, -6.3910256082748286e-20, -1.3359471352246525e-19, -2.4130091278097972e-19, -4.0454414656527346e-19, -6.5353081210614743e-19, -1.0415819185462306e-18, -1.6664629993557316e-18, -2.7263153489721653e-18, -4.8324609632365386e-18, -1.1690263153984856e-17, 3.5178648571894944e-17, -9.5107729449938350e-16], [-2.7271562731755309e-23, -2.4844560380361252e-22, -7.0705594516686485e-22, -1.4367427320954045e-21, -2.4900775297030177e-21, -3.9379287566315583e-21, -5.8569602178846089e-21, -8.2664916442155055e-21, -1.0830822980795746e-20, -1.1246599156630200e-20, 4.8439180115969009e-21, 9.5549678019135701e-20, -8.3478684322752429e-20, -2.4479723839172702e-17], [8.1431314751664543e-25, 7.5346056995361194e-24, 2.2139563475549595e-23, 4.7312293638147114e-23, 8.8141427068669366e-23, 1.5403297494412284e-22, 2.6287357354283492e-22, 4.5059634044722741e-22, 7.9471270764654397e-22, 1.4772363535729526e-21, 3.0070438205241288e-21, 8.2711133163288754e-21, -3.0944345321129963e-21, 1.2579949201674139e-19], [4.2210481130555814e-26, 3.8799143886224785e-25, 1.1248669598144683e-24, 2.3545170458572744e-24, 4.2616521397019877e-24, 7.1682853966844430e-24, 1.1643930509986358e-23, 1.8740865522640239e-23, 3.0537472453959109e-23, 5.1475864757524314e-23, 9.0812632423535229e-23, 1.5770199090552176e-22, 6.6356032974249396e-22, 1.8643210977875753e-20]],
        [[1.0081473395566962e-3, 9.1644400278533174e-3, 2.5979164122768443e-2, 5.2539662504648773e-2, 9.0711810489549026e-2, 1.4351327062699428e-1, 2.1582293717388093e-1, 3.1578801419860450e-1, 4.5783983607395191e-1, 6.6992216056451897e-1, 1.0137929321179508e+0, 1.6573495319170770e+0, 3.2602310432480245e+0, 12.106207244761831e+0], [-4.0861960321403437e-5, -3.7401871461785813e-4, -1.0752120681789267e-3, -2.2219370510659955e-3, -3.9528732796084320e-3, -6.5055153230676053e-3, -1.0292326638098944e-2, -1.6063482365770837e-2, -2.5286813880463643e-2, -4.1151114806643655e-2, -7.1713494819031634e-2, -1.4265236780258511e-1, -3.7664940342389850e-1, -2.2661441092335478e+0], [6.1391954552968273e-7, 5.6535392793583059e-6, 1.6453860308245728e-5, 3.4651734857215828e-5, 6.3279056355222216e-5, 1.0777211908007813e-4, 1.7811615085739289e-4, 2.9369443414980930e-4, 4.9534599576667613e-4, 8.7948991988390903e-4, 1.7135470510724505e-3, 3.9423554961423033e-3, 1.2574649698497915e-2, 8.9462596969603955e-2], [-8.4232937126549856e-9, -7.7841526726026814e-8, -2.2815873792759799e-7, -4.8574384127337185e-7, -9.0034568403050595e-7, -1.5633003120805264e-6, -2.6470331196111041e-6, -4.4963067274355437e-6, -7.8594098513492142e-6, -1.4549750542964482e-5, -2.9665865090882514e-5, -7.0758653104828937e-5, -2.1508609234159085e-4, -5.7116968393142203e-4], [1.2168157335993423e-10, 1.1241003144504575e-9, 3.2922130324549644e-9, 6.9987390175710927e-9, 1.2938940857299205e-8, 2.2365738047322952e-8, 3.7574983497472156e-8, 6.2939604733392009e-8, 1.0718909313921079e-7, 1.8834038207636123e-7, 3.4069914543905479e-7, 5.6159106709850601e-7, -6.9085271064711058e-7, -3.9384462332089156e-5], [6.4382339913721678e-13, 5.9354188734358597e-12, 1.7333754248790889e-11, 3.6821200442192813e-11, 6.8532663212553409e-11, 1.2127511472288144e-10, 2.1535744684177542e-10, 4.0307955406331743e-10, 8.3866680854087470e-10, 2.0587395125726559e-9, 6.3637278805972055e-9, 2.6634054252075464e-8, 1.5469016007615496e-7, -8.4626439384113557e-7], [1.0134290281574857e-13, 9.2771071807278930e-13, 2.6663201376884038e-12, 5.5011962878574631e-12, 9.7385491466566023e-12, 1.5835785790027750e-11, 2.4398075378247661e-11, 3.5973706957768944e-11, 4.9909963398218193e-11, 5.8908067176792032e-11, 2.3342557511064703e-11, -2.2849776816320619e-10, 2.8562915162949323e-10, 3.4279834011162739e-8], [-4.2717379585067858e-16, -4.0491307630219761e-15, -1.2455411981821513e-14, -2.8345849888874912e-14, -5.6878713171183607e-14, -1.0759866149195974e-13, -1.9851695323722747e-13, -3.6557541976783163e-13, -6.8950224204524984e-13, -1.4064465752678816e-12, -3.6670783924749816e-12, -1.8217392731974345e-11, -2.0795076022582638e-10, 2.5584298178076262e-9], [-2.4301667701826955e-16, -2.2399361808568793e-15, -6.5309551566036643e-15, -1.3792863034597503e-14, -2.5285269860339249e-14, -4.3278437558994056e-14, -7.1955872479831699e-14, -1.1940640863017198e-13, -2.0226026163833496e-13, -3.5664928945356998e-13, -6.5856431890548032e-13, -1.1780677001489026e-12, -3.2393727192441594e-12, 1.1711933261784709e-11], [-1.2020292400336764e-17, -1.1025450075240090e-16, -3.1825874132067069e-16, -6.6161576858446064e-16, -1.1858966670968013e-15, -1.9684067537290338e-15, -3.1411402071015927e-15, -4.9377983801075727e-15, -7.7992208357639332e-15, -1.2645317819038440e-14, -2.1662191057281222e-14, -3.7451432613166298e-14, 1.4938068409794709e-13, -4.4298294602342238e-12], [-2.3518582502537957e-20, -1.9464979935796486e-19, -4.3613793229749174e-19, -4.9164977372787529e-19, 1.9715506302796054e-19, 2.8379616143853673e-18, 1.0137656954268676e-17, 2.8547834270342747e-17, 7.4855893236428509e-17, 1.9815120810892489e-16, 5.6166441968487730e-16, 1.6949436305308793e-15, 6.3305420893499745e-15, -1.3881586409419318e-13], [2.5281467586186730e-20, 2.3294389139636939e-19, 6.7869253079636532e-19, 1.4316086067710449e-18, 2.6196462612296703e-18, 4.4719875738155210e-18, 7.4082461394396557e-18, 1.2237452904616436e-17, 2.0643892819286233e-17, 3.6540955466140722e-17, 7.0746009914502101e-17, 1.6269634958501514e-16, 2.2857248765556594e-16, 4.5862536271314615e-15], [1.2862950923106093e-21, 1.1806004584176503e-20, 3.4124959810169049e-20, 7.1094503425489756e-20, 1.2783469588096623e-19, 2.1312674756069078e-19, 3.4215695418870243e-19, 5.4210080651763378e-19, 8.6399431605136053e-19, 1.4083296981137552e-18, 2.3710966897859171e-18, 4.0907396254980457e-18, 9.1864241529604581e-18, 3.6129908764918599e-16], [1.1822023458729403e-23, 1.0693048161768902e-22, 2.9969401647241948e-22, 5.9349336181739123e-22, 9.8737141991791403e-22, 1.4620012757869105e-21, 1.9411893570108294e-21, 2.1810783119480463e-21, 1.4251965005998496e-21, -2.8050916970246904e-21, -1.9908020158393221e-20, -1.0082809356806729e-19, -3.4145364535875508e-19, 1.8186715330069748e-19]],
        [[9.3103917870808667e-4, 8.4588991025958306e-3, 2.3952362898065790e-2, 4.8355950511979275e-2, 8.3280681607256751e-2, 1.3130950031959159e-1, 1.9657016676808811e-1, 2.8585239249809433e-1, 4.1095194830018672e-1, 5.9414139292667892e-1, 8.8301870822665430e-1, 1.4010273754181949e+0, 2.5993737075447822e+0, 8.2597597379241816e+0], [-3.6320088356321279e-5, -3.3220509110884211e-4, -9.5359113541915203e-4, -1.9660385277551340e-3, -3.4861623232209091e-3, -5.7119939537928485e-3, -8.9837331103836686e-3, -1.3911767787389799e-2, -2.1670540321813531e-2, -3.4758902277444034e-2, -5.9326910033177921e-2, -1.1431984374352975e-1, -2.8633709992356327e-1, -1.5894513476906880e+0], [5.2531501612183750e-7, 4.8346405208795962e-6, 1.4053093540618085e-5, 2.9538770165126359e-5, 5.3796979530746013e-5, 9.1295348023191965e-5, 1.5018514499647932e-4, 2.4616678281946072e-4, 4.1203192553199756e-4, 7.2447947599716593e-4, 1.3943494868925051e-3, 3.1630995297451309e-3, 1.0024861951877904e-2, 7.8477632149902619e-2], [-6.2657298868204354e-9, -5.7923162894701407e-8, -1.6989837303707256e-7, -3.6211811797631714e-7, -6.7229247661693692e-7, -1.1699687564181815e-6, -1.9872842313608037e-6, -3.3908862158824585e-6, -5.9675268453392479e-6, -1.1170785931158767e-5, -2.3250106252920893e-5, -5.8068099772248290e-5, -2.0312213805217849e-4, -1.2690551554173447e-3], [1.5187956810349827e-10, 1.4007731353733068e-9, 4.0892924039732668e-9, 8.6524357403679383e-9, 1.5901628067740775e-8, 2.7303852312719816e-8, 4.5574898084436300e-8, 7.6012643327890692e-8, 1.2974850757285481e-7, 2.3251866679684951e-7, 4.5103108142784721e-7, 9.7375658355473835e-7, 1.9685465170125632e-6, -4.2779351783463815e-5], [1.7204041060878057e-12, 1.5690501955924248e-11, 4.4768178166020232e-11, 9.1403845428622118e-11, 1.5977314809138706e-10, 2.5660993121118708e-10, 3.9301095971860396e-10, 5.8916789406369891e-10, 8.9050766040630538e-10, 1.4407255300425678e-9, 2.9243222974711704e-9, 1.0376934496464722e-8, 8.7220647098030345e-8, 7.0768304933750875e-7], [-6.8265979408057462e-14, -6.3491031188134818e-13, -1.8852053383909690e-12, -4.0938619683142862e-12, -7.7979491219573697e-12, -1.4032738986334607e-11, -2.4879115552613845e-11, -4.4843410198313435e-11, -8.4771919739634378e-11, -1.7486360513144692e-10, -4.1825558395222550e-10, -1.2854614256737130e-9, -5.7062661638928029e-9, 8.3174146234103060e-8], [-1.2159967140015671e-14, -1.1177354350551847e-13, -3.2405417712423083e-13, -6.7826428886576087e-13, -1.2274525909752350e-12, -2.0637584364628605e-12, -3.3490001964818878e-12, -5.3781247112778410e-12, -8.7187042158050750e-12, -1.4540580390062736e-11, -2.5479357285808745e-11, -4.8900332905780520e-11, -1.5599765775862582e-10, -3.1917273601899217e-11], [-2.8676192230115511e-16, -2.6172669572731276e-15, -7.4774331877735228e-15, -1.5289513546419131e-14, -2.6745717593083517e-14, -4.2866919263048500e-14, -6.5014708870138718e-14, -9.4597686011127635e-14, -1.3132094357163829e-13, -1.6425611033920559e-13, -1.2010753470406400e-13, 5.5693046479721164e-13, 8.9781743156545672e-12, -1.6127658813220524e-10], [2.2264796725968391e-17, 2.0560309590224334e-16, 6.0173876302692284e-16, 1.2781455489595567e-15, 2.3615660233753667e-15, 4.0833654954917315e-15, 6.8773423972271751e-15, 1.1604037345782629e-14, 2.0113764319227672e-14, 3.6834508754539680e-14, 7.3945893449186935e-14, 1.7141212091138304e-13, 5.3287242004759869e-13, -2.2284961812804739e-12], [1.7047864340662561e-18, 1.5658835941653301e-17, 4.5331174852700190e-17, 9.4667289121633076e-17, 1.7079366315139114e-16, 2.8603328712634049e-16, 4.6193002590635733e-16, 7.3760607353744819e-16, 1.1882081364982315e-15, 1.9684917161173121e-15, 3.4186668231450660e-15, 6.1869666699435212e-15, 3.3584717291887670e-15, 2.7799981250845302e-13], [9.5514971744740157e-21, 8.4973185044238964e-20, 2.2952444425493681e-19, 4.2500596210687573e-19, 6.2585118633637652e-19, 7.2113050805875708e-19, 4.3849218341208333e-19, -9.1632639964694999e-19, -5.2401676932010262e-18, -1.8313074871169314e-17, -6.0885193642652170e-17, -2.2751540502348248e-16, -1.1340308991881708e-15, 7.6982257820111042e-15], [-4.1532433376809364e-21, -3.8271796420189698e-20, -1.1153129985555190e-19, -2.3535489120607903e-19, -4.3096454319684986e-19, -7.3655085172700946e-19, -1.2225290194741675e-18, -2.0260396160766322e-18, -3.4365022668530975e-18, -6.1357193822166026e-18, -1.1993965550435064e-17, -2.7379245055122868e-17, -7.4779467612131776e-17, -4.0704490489132468e-16], [-2.0048747885850274e-22, -1.8405444533921408e-21, -5.3224403877038739e-21, -1.1096128184059298e-20, -1.9970284240709924e-20, -3.3332830784224801e-20, -5.3583833916221998e-20, -8.5009824378735165e-20, -1.3561866041617629e-19, -2.2102321106878369e-19, -3.7102305233603593e-19, -6.1076665360721363e-19, -3.2515770788761578e-19, -1.6948860642046949e-17]],
        [[8.6239357628344202e-4, 7.8312428626276425e-3, 2.2151959389811759e-2, 4.4648133718009761e-2, 7.6716320503211647e-2, 1.2057677954845114e-1, 1.7973757755861249e-1, 2.5988412633980320e-1, 3.7070545916801435e-1, 5.3003968336165436e-1, 7.7472279996844369e-1, 1.1956752420624162e+0, 2.0996120221486036e+0, 5.6533665505678740e+0], [-3.2375579601237181e-5, -2.9591434597959069e-4, -8.4817319427849772e-4, -1.7446857960512234e-3, -3.0836147644475797e-3, -5.0301925034001115e-3, -7.8650204256820712e-3, -1.2084261546914947e-2, -1.8625207643599600e-2, -2.9435973095959941e-2, -4.9165641689184009e-2, -9.1534448986951713e-2, -2.1527264517519379e-1, -1.0324454679823559e+0], [4.6522197441823707e-7, 4.2786641056747954e-6, 1.2419658042242188e-5, 2.6048649469175354e-5, 4.7295473197261927e-5, 7.9931803858654025e-5, 1.3077858874535723e-4, 2.1283243133388298e-4, 3.5288404827641890e-4, 6.1260326340318579e-4, 1.1582119960114779e-3, 2.5601778072555151e-3, 7.8076524324660604e-3, 5.9934068306334768e-2], [-3.7700939646473541e-9, -3.4936015301793154e-8, -1.0296767935037725e-7, -2.2106632907200901e-7, -4.1447154732465855e-7, -7.3034952328788650e-7, -1.2597216264587394e-6, -2.1895690838943332e-6, -3.9398731934971403e-6, -7.5771146111049308e-6, -1.6323133452139309e-5, -4.2850221269474097e-5, -1.6580197413244047e-4, -1.7427485577845979e-3], [1.4165365617136079e-10, 1.3029792041204136e-9, 3.7833229148700245e-9, 7.9392593420199489e-9, 1.4427199731040616e-8, 2.4414580401440100e-8, 4.0024669530370524e-8, 6.5331529728168962e-8, 1.0879980026078377e-7, 1.9005161916720238e-7, 3.6195978409794300e-7, 7.9985617065033923e-7, 2.2252973775733109e-6, -1.1754699494128282e-5], [-3.8904067101902604e-12, -3.5972879788233523e-11, -1.0555398132960942e-10, -2.2505064758289600e-10, -4.1780465350528433e-10, -7.2640367717128078e-10, -1.2304329916321662e-9, -2.0864696285417004e-9, -3.6256312708739765e-9, -6.6158041266643638e-9, -1.3041639288110620e-8, -2.8402959060152602e-8, -5.4425869737187345e-8, 2.1212709492127014e-6], [-3.3999754949636080e-13, -3.1214417719712425e-12, -9.0274816014955279e-12, -1.8824183419214749e-11, -3.3891717757094806e-11, -5.6610215642153914e-11, -9.1133981050176419e-11, -1.4502128112705272e-10, -2.3295252989943619e-10, -3.8625821264801559e-10, -6.8205773368179899e-10, -1.3649095383041739e-9, -3.7975444453165695e-9, 1.5032769906084641e-8], [9.7091032009584282e-16, 9.6962360760065375e-15, 3.2707478552327527e-14, 8.3566993039024042e-14, 1.9022172248220773e-13, 4.0967226710045202e-13, 8.6254317361978537e-13, 1.8206521812863804e-12, 3.9528518018070862e-12, 9.1174855954959109e-12, 2.3451247282236087e-11, 7.3166498215961150e-11, 3.1982254755141984e-10, -4.0956432202299674e-9], [1.1542402332370124e-15, 1.0620212182875784e-14, 3.0853068832413924e-14, 6.4785657956629567e-14, 1.1778624924978742e-13, 1.9931105141879689e-13, 3.2629580734087824e-13, 5.3045943330542705e-13, 8.7523684387120484e-13, 1.4988834437155811e-12, 2.7367624947531768e-12, 5.5026285476505892e-12, 1.2423329063518641e-11, -2.5848471986753561e-11], [2.3943501565920076e-17, 2.1798716963065354e-16, 6.1947809466263067e-16, 1.2554528843058831e-15, 2.1657111463953713e-15, 3.3962188221424107e-15, 4.9716627404434416e-15, 6.7955187505106556e-15, 8.2852729782226991e-15, 6.9243013210254164e-15, -8.5143522762088884e-15, -1.0001744288706318e-13, -8.1498437671112823e-13, 8.2973537326569603e-12], [-3.0764375051436499e-18, -2.8375133195041217e-17, -8.2843483324246869e-17, -1.7530837979679279e-16, -3.2223231309523751e-16, -5.5338000801748694e-16, -9.2389705179297994e-16, -1.5416254741154173e-15, -2.6345855919232326e-15, -4.7381112385562761e-15, -9.2954569770403003e-15, -2.0929998350693976e-14, -5.5263311504853705e-14, 6.5239529794319664e-14], [-1.4726240942503060e-19, -1.3500631475850743e-18, -3.8928521812962225e-18, -8.0778833624674853e-18, -1.4436835264213254e-17, -2.3851891834054395e-17, -3.7771033473667606e-17, -5.8571866680537912e-17, -9.0070428451776737e-17, -1.3746571397531915e-16, -1.9998168094407043e-16, -1.8881942048788489e-16, 1.2996445232905751e-15, -1.5705502941112421e-14], [6.0809259260440897e-21, 5.6305041589185367e-20, 1.6569204111805216e-19, 3.5493583670252473e-19, 6.6358276225059360e-19, 1.1655171726024915e-18, 2.0033490766581938e-18, 3.4702167890651935e-18, 6.2249042380496258e-18, 1.1938169045719190e-17, 2.5612400707667000e-17, 6.6142357553880562e-17, 2.2572336626698950e-16, -2.0585107525816556e-16], [6.0542536286255866e-22, 5.5675479843288446e-21, 1.6156603807771650e-20, 3.3867236248556244e-20, 6.1422202204965574e-20, 1.0358328674506938e-19, 1.6878912094365091e-19, 2.7259210875902525e-19, 4.4527374121303368e-19, 7.4951358505395423e-19, 1.3191448504249319e-18, 2.3603258247552181e-18, 1.4690390454401073e-18, 2.3775630129596539e-17]],
        [[8.0124262720047905e-4, 7.2725153639732238e-3, 2.0551635819949186e-2, 4.1359961892216599e-2, 7.0913899460954272e-2, 1.1113179639442887e-1, 1.6501193697708732e-1, 2.3734487173187806e-1, 3.3614465958347423e-1, 4.7580891294480230e-1, 6.8509077589947448e-1, 1.0315800799895756e+0, 1.7255901998935635e+0, 4.0015575232334940e+0], [-2.8804676184138334e-5, -2.6308536524790181e-4, -7.5295642937556733e-4, -1.5452286342688573e-3, -2.7221033930277030e-3, -4.4206660480231639e-3, -6.8708883625357531e-3, -1.0473109338952485e-2, -1.5968733774592635e-2, -2.4859687498167314e-2, -4.0608864449557922e-2, -7.2942412085916889e-2, -1.6026269183673217e-1, -6.3665876965001891e-1], [4.2978421124667636e-7, 3.9495261659249700e-6, 1.1445173753699592e-5, 2.3942342244891956e-5, 4.3311278749158904e-5, 7.2834408872503202e-5, 1.1837968115633620e-4, 1.9096711551514658e-4, 3.1290527484831154e-4, 5.3437569705960945e-4, 9.8657319573574582e-4, 2.1008149589238531e-3, 5.9889801515678625e-3, 3.9253146879384903e-2], [-2.4847981126030268e-9, -2.3129214121009029e-8, -6.8777119844520478e-8, -1.4960496037799833e-7, -2.8530013333935601e-7, -5.1317589030643426e-7, -9.0632697066888825e-7, -1.6171434881380259e-6, -2.9926514624205736e-6, -5.9248272866401769e-6, -1.3135559263637708e-5, -3.5417330115634901e-5, -1.4045828926297686e-4, -1.6090481069065723e-3], [5.7179835177924985e-12, 5.1721729828725711e-11, 1.4527718601717547e-10, 2.9046726016850399e-10, 4.9713005890589178e-10, 7.9056473897818798e-10, 1.2416257635732388e-9, 2.0659155695477554e-9, 3.9820792039229547e-9, 9.6885227267727277e-9, 3.1245545434562873e-8, 1.3982166059995296e-7, 1.0303490097392805e-6, 2.5634102100722642e-5], [-7.7685710901208149e-12, -7.1315700437108046e-11, -2.0621188501393527e-10, -4.2983852050520485e-10, -7.7338709473791488e-10, -1.2902845222330175e-9, -2.0727194091558488e-9, -3.2851066946876439e-9, -5.2352408189461211e-9, -8.5324373325120413e-9, -1.4428175556696821e-8, -2.5063822795515832e-8, -2.9720173591274670e-8, 1.2727384181661645e-6], [1.3163596538699600e-13, 1.2266323797252568e-12, 3.6550594621031309e-12, 7.9731619353802879e-12, 1.5255050377241835e-11, 2.7528327971723475e-11, 4.8734983577514901e-11, 8.6984412231219272e-11, 1.6032397185520575e-10, 3.1330670668233106e-10, 6.7191051684035929e-10, 1.6574950629782965e-9, 4.7022402182184477e-9, -7.0532150259477578e-8], [2.3763111851328075e-14, 2.1816498892897032e-13, 6.3093441441712078e-13, 1.3154306997174917e-12, 2.3672882045371445e-12, 3.9499308776715898e-12, 6.3441645076235785e-12, 1.0047088676963498e-11, 1.5976959669054930e-11, 2.5905993470488503e-11, 4.3278339222081161e-11, 7.2959114512470495e-11, 8.3226635671735506e-11, -9.5931599211755808e-10], [-4.2789272575786502e-16, -3.9919666829907698e-15, -1.1923708808087453e-14, -2.6107685889154339e-14, -5.0214105048952321e-14, -9.1252720299916595e-14, -1.6305952609410022e-13, -2.9465655203442557e-13, -5.5230774508453145e-13, -1.1055459178871885e-12, -2.4609509610869368e-12, -6.4998807832983340e-12, -2.2365119035949202e-11, 1.6409446572551535e-10], [-7.8750709003175494e-17, -7.2329165220181027e-16, -2.0934882482432787e-15, -4.3701766300725820e-15, -7.8780759380708700e-15, -1.3173184869494661e-14, -2.1212012800863393e-14, -3.3685463824604131e-14, -5.3690637475141762e-14, -8.7032027570697215e-14, -1.4377797348197908e-13, -2.2629459988527981e-13, -4.3440675035543790e-14, -7.5536598620088641e-13], [1.4985376416434248e-18, 1.3979729604326454e-17, 4.1754757917813964e-17, 9.1432065778359938e-17, 1.7592140019806212e-16, 3.1998565977890010e-16, 5.7277621013202527e-16, 1.0381125965790958e-15, 1.9550539212533763e-15, 3.9413443867634005e-15, 8.8630191870800691e-15, 2.3709716976773497e-14, 8.2147674256482894e-14, -3.4916648932959782e-13], [2.5846002542653793e-19, 2.3750220004686539e-18, 6.8811752946777904e-18, 1.4386880211098439e-17, 2.5991056464158582e-17, 4.3583469613604861e-17, 7.0431313893557727e-17, 1.1233853553996338e-16, 1.7996745260747457e-16, 2.9319606018640831e-16, 4.8482794373554038e-16, 7.3900280109668760e-16, -3.7332822471263484e-16, 5.7811213040984636e-15], [-5.1452368587596680e-21, -4.8011792608889438e-20, -1.4348360860377060e-19, -3.1450484401062150e-19, -6.0609757953027379e-19, -1.1051514996175268e-18, -1.9854874552501154e-18, -3.6178327519992079e-18, -6.8659868566192856e-18, -1.3993937693518478e-17, -3.1951674451954530e-17, -8.7113089630181289e-17, -3.0104976557060858e-16, 7.4605055886297030e-16], [-8.4812998963750632e-22, -7.7984077825190912e-21, -2.2622930710699043e-20, -4.7391315249647921e-20, -8.5847922244262492e-20, -1.4446744416272884e-19, -2.3451688549226808e-19, -3.7614856456413630e-19, -6.0659004138915478e-19, -9.9514269026644975e-19, -1.6512119881898072e-18, -2.4428810625939760e-18, 2.9153597840669530e-18, -1.6917207003120911e-17]],
        [[7.4697170445281096e-4, 6.7770121015655521e-3, 1.9134526435656669e-2, 3.8455056753722903e-2, 6.5804798312206250e-2, 1.0285273521762625e-1, 1.5218132186155056e-1, 2.1786272890723360e-1, 3.0659342771958687e-1, 4.3013490407848878e-1, 6.1126239445452406e-1, 9.0116749772457642e-1, 1.4478315709205844e+0, 2.9869380757550719e+0], [-2.5493894845294930e-5, -2.3267490655484081e-4, -6.6491512704993818e-4, -1.3613276343411612e-3, -2.3901292823614297e-3, -3.8639888805985506e-3, -5.9695219038695213e-3, -9.0263301414548566e-3, -1.3614103075942999e-2, -2.0875908025948092e-2, -3.3353256328684322e-2, -5.7820343705315171e-2, -1.1881937265485350e-1, -3.9156398948289060e-1], [3.9643700953427058e-7, 3.6395679005115800e-6, 1.0526134682407258e-5, 2.1951879635743699e-5, 3.9537401797549969e-5, 6.6095910714914139e-5, 1.0658540826007686e-4, 1.7015115678348684e-4, 2.7489158251007935e-4, 4.6034732180914304e-4, 8.2592536521208438e-4, 1.6804950093621055e-3, 4.4016532328146534e-3, 2.2945952258724049e-2], [-3.2923135721505287e-9, -3.0534357461946738e-8, -9.0138002493460566e-8, -1.9393676555999668e-7, -3.6446998462028745e-7, -6.4360010613804274e-7, -1.1113662139032191e-6, -1.9299823890701063e-6, -3.4568500471841096e-6, -6.5750304945205289e-6, -1.3848949707317190e-5, -3.4786302859058348e-5, -1.2308703420084893e-4, -1.0868046871631032e-3], [-8.0423094226065689e-11, -7.3568052152187960e-10, -2.1114995060055348e-9, -4.3482690467983026e-9, -7.6819551367053789e-9, -1.2475262375901904e-8, -1.9249708089187419e-8, -2.8661022257620163e-8, -4.1138215444151276e-8, -5.4794357389200031e-8, -5.3641710055354049e-8, 7.3241665548475995e-8, 1.3979967732188273e-6, 3.4660407750440158e-5], [2.2925849788466746e-14, 4.6600205257550726e-13, 2.8614702247100955e-12, 1.0897717699286617e-11, 3.2171437730300674e-11, 8.2077078353311289e-11, 1.9268498180735452e-10, 4.3423319000675695e-10, 9.7169812994508407e-10, 2.2307569123146405e-9, 5.4567929029595260e-9, 1.4933853649755053e-8, 4.6933433715023411e-8, -2.4942729974271096e-7], [3.4930437356010826e-13, 3.2052594730542023e-12, 9.2597125394197088e-12, 1.9272177835109890e-11, 3.4594053221944377e-11, 5.7509126380852022e-11, 9.1877495038790201e-11, 1.4436445333751259e-10, 2.2679308720151212e-10, 3.6029617965622734e-10, 5.7835360686307601e-10, 8.7384857160516721e-10, 1.6296077678165731e-10, -4.2079236881281072e-8], [-1.0150988319497966e-14, -9.4080793808037714e-14, -2.7734995675170549e-13, -5.9550193138307723e-13, -1.1159872243190299e-12, -1.9633690737896434e-12, -3.3737588209081489e-12, -5.8193289532070355e-12, -1.0318108662173180e-11, -1.9292594264100205e-11, -3.9286982874111396e-11, -9.0838554784771724e-11, -2.3661429937119344e-10, 2.0804270916176185e-9], [-8.1470388228457749e-16, -7.4541123736846586e-15, -2.1404651201542713e-14, -4.4121225080823120e-14, -7.8085960404812446e-14, -1.2722148190447582e-13, -1.9748626405535818e-13, -2.9743159136518298e-13, -4.3721762188779131e-13, -6.1775162288865868e-13, -7.6092839938381478e-13, -2.3151927121937756e-13, 6.4454385124271041e-12, 4.1331551671604023e-12], [5.2892502712068050e-17, 4.8800471146994311e-16, 1.4256177506493302e-15, 3.0190916018994906e-15, 5.5533405537676467e-15, 9.5400756518101484e-15, 1.5917099340866750e-14, 2.6486774928466356e-14, 4.4955251712280353e-14, 7.9631645350326346e-14, 1.5115593498978536e-13, 3.1517784521203274e-13, 6.5689393542720005e-13, -4.4908288131237657e-12], [1.2050327054338782e-18, 1.0920621285706573e-17, 3.0730316451073468e-17, 6.1250400931218238e-17, 1.0288719731363869e-16, 1.5456134401518243e-16, 2.1007623290500181e-16, 2.4738962447323564e-16, 1.9461664453701802e-16, -1.8994364334074535e-16, -1.8124564243409723e-15, -8.7846086657312843e-15, -4.5337879211962749e-14, 1.4842915065815905e-13], [-1.9722134575469903e-19, -1.8156047680803318e-18, -5.2800016750606694e-18, -1.1103192032759317e-17, -2.0221844183515943e-17, -3.4278428372323638e-17, -5.6187907924220136e-17, -9.1315662059111282e-17, -1.5004175804681087e-16, -2.5351999902892789e-16, -4.4548902984980563e-16, -7.8989839369789545e-16, -7.3042702463175010e-16, 5.2017667814729998e-15], [1.2428845939856727e-21, 1.2013151508884847e-20, 3.8341355144804393e-20, 9.1833966593908394e-20, 1.9620393796076587e-19, 3.9933527318478763e-19, 8.0140833325655073e-19, 1.6249792856047381e-18, 3.4066273313357969e-18, 7.5878932243408777e-18, 1.8638606277630992e-17, 5.3218120608055160e-17, 1.8097575270409686e-16, -5.2023968537020601e-16], [5.8707155191731268e-22, 5.3929868444681115e-21, 1.5614253575006853e-20, 3.2605013978041633e-20, 5.8780562086352820e-20, 9.8226237905897187e-20, 1.5781807562666028e-19, 2.4922954687782596e-19, 3.9216279241901497e-19, 6.1669549751662797e-19, 9.3886010110763415e-19, 1.0478472721295772e-18, -3.6220079520823188e-18, 3.5477244415100473e-18]],
        [[6.9901637478781334e-4, 6.3394913940103747e-3, 1.7885116782199733e-2, 3.5899904360266244e-2, 6.1325691386135544e-2, 9.5626993419878923e-2, 1.4104960201546395e-1, 2.0109344866389376e-1, 2.8142694968380881e-1, 3.9180906229660783e-1, 5.5063414087552874e-1, 7.9768014334556266e-1, 1.2410396055526374e+0, 2.3523169662807110e+0], [-2.2499925682130248e-5, -2.0520193277751762e-4, -5.8554082098233912e-4, -1.1960597354672093e-3, -2.0931372666557973e-3, -3.3690080885283372e-3, -5.1745374410328736e-3, -7.7639886934217965e-3, -1.1589231192214901e-2, -1.7518159847737428e-2, -2.7413863825399575e-2, -4.6000085582122643e-2, -8.9070229209173612e-2, -2.5137686439677784e-1], [3.5035776207984579e-7, 3.2132243207344436e-6, 9.2735543529218615e-6, 1.9276233396334793e-5, 3.4557557829161624e-5, 5.7409949741669082e-5, 9.1812040594831705e-5, 1.4496189489159396e-4, 2.3076151814294840e-4, 3.7864900848455934e-4, 6.5961204893149409e-4, 1.2814685436915211e-3, 3.0857026739915443e-3, 1.2940809498583452e-2], [-4.2466851638136952e-9, -3.9220979914078900e-8, -1.1480958493209277e-7, -2.4388461635494053e-7, -4.5047670667939211e-7, -7.7805760559780621e-7, -1.3071350046546858e-6, -2.1948923724620870e-6, -3.7728657408310731e-6, -6.8187041181486917e-6, -1.3449305561846636e-5, -3.0862741704908025e-5, -9.4670572570343161e-5, -6.0841458151075051e-4], [-2.6870972059348177e-11, -2.4065689292350175e-10, -6.5997493659317690e-10, -1.2574382985524608e-9, -1.9563997399358624e-9, -2.5566390223881073e-9, -2.5469341723351953e-9, -6.0218114991479289e-10, 6.8927560151035905e-9, 3.0748974376191606e-8, 1.0840164051157158e-7, 4.0392874599443918e-7, 2.0083035210105978e-6, 2.3898568090255834e-5], [3.7872761334593402e-12, 3.4819638122888990e-11, 1.0098537659958006e-10, 2.1144783535655803e-10, 3.8271714552756993e-10, 6.4317889842490404e-10, 1.0418796979259346e-9, 1.6658991308000711e-9, 2.6754553008844782e-9, 4.3729663048794763e-9, 7.2966385672002795e-9, 1.1739293948953181e-8, 4.6306289306268080e-9, -6.4976270388525638e-7], [-2.7194696730082170e-14, -2.5976617160714493e-13, -8.1118681776141823e-13, -1.8872387981849717e-12, -3.8981324496465278e-12, -7.6470162697168553e-12, -1.4754575034119896e-11, -2.8675002412598546e-11, -5.7346800405168401e-11, -1.2093189089730171e-10, -2.7793072066220200e-10, -7.3087618317353185e-10, -2.3147967764211144e-9, 2.6432306580671811e-9], [-9.4526438057422693e-15, -8.6559343604691058e-14, -2.4899273353584676e-13, -5.1469888882316485e-13, -9.1474799827725405e-13, -1.4994649520136081e-12, -2.3485797734553482e-12, -3.5861770704491126e-12, -5.3939417258296210e-12, -7.9673866597111695e-12, -1.1035801546828244e-11, -9.9894967590702591e-12, 4.3738539039793716e-11, 8.5809593816728321e-10], [5.1002687564833376e-16, 4.7015640444433082e-15, 1.3710057850410755e-14, 2.8952352490050613e-14, 5.3040899164246079e-14, 9.0618128207694854e-14, 1.5007340349831632e-13, 2.4723759593420527e-13, 4.1388202278822191e-13, 7.1886901240402986e-13, 1.3245985334455233e-12, 2.6267043553881612e-12, 4.8636314612816678e-12, -4.7582176168876472e-11], [3.0730878689203324e-18, 2.6700920815185041e-17, 6.8216590247787074e-17, 1.1265976132244548e-16, 1.2657913967131428e-16, 3.6265567031717451e-17, -3.2440723567869334e-16, -1.3469421572644548e-15, -4.0179814561051586e-15, -1.1071963182310251e-14, -3.1162229953034342e-14, -9.7120033788798746e-14, -3.5857748798063715e-13, 8.0613858574817227e-13], [-1.5459744444448124e-18, -1.4182664036780529e-17, -4.0950846454936477e-17, -8.5151389532735558e-17, -1.5261293142664911e-16, -2.5306155852848077e-16, -4.0259853197688658e-16, -6.2805820820501897e-16, -9.7397128675547773e-16, -1.5085078923871586e-15, -2.2845149541101542e-15, -2.8399928264363521e-15, 3.6191224562511960e-15, 5.0839493560572501e-14], [5.9624954063774660e-20, 5.5147371446372778e-19, 1.6189919274824218e-18, 3.4541907064574886e-18, 6.4174075618848998e-18, 1.1164034230300332e-17, 1.8912275483167234e-17, 3.2037847894387364e-17, 5.5494431479769377e-17, 1.0051633696722093e-16, 1.9515427889349550e-16, 4.1405260177193161e-16, 8.5538874638229560e-16, -4.0776602380896676e-15], [1.6364282523870383e-21, 1.4811809033597870e-20, 4.1569560674116717e-20, 8.2483073919379966e-20, 1.3755820169540816e-19, 2.0422631107518641e-19, 2.7182465593321460e-19, 3.0577468849139306e-19, 1.9892822834915361e-19, -3.9422442269910120e-19, -2.7089166745519196e-18, -1.1954637547651109e-17, -5.4154486247255748e-17, 9.4630549261336758e-17], [-2.3473309328574074e-22, -2.1578972742528615e-21, -6.2571066969637837e-21, -1.3096436748614445e-20, -2.3688820573260780e-20, -3.9765476870752696e-20, -6.4286738666879967e-20, -1.0241008240839832e-19, -1.6327915047875002e-19, -2.6274131696781014e-19, -4.2173016117310034e-19, -5.9424735282786992e-19, 3.3872026037851423e-19, 4.0283885273961839e-18]],
        [[6.5665630672757771e-4, 5.9532884383597156e-3, 1.6783825843114362e-2, 3.3652677019065858e-2, 5.7398727788383169e-2, 8.9318773597918040e-2, 1.3138578276237483e-1, 1.8664309332218506e-1, 2.5995481166723839e-1, 3.5955233323337022e-1, 5.0059873423567084e-1, 7.1484439000193692e-1, 1.0843669168030842e+0, 1.9339396196123198e+0], [-1.9903004493725925e-5, -1.8139637903784260e-4, -5.1690444038032028e-4, -1.0536099917933489e-3, -1.8383131153696716e-3, -2.9469062644214198e-3, -4.5020920040522687e-3, -6.7076328562811554e-3, -9.9189380876379283e-3, -1.4802490731308286e-2, -2.2744541332523869e-2, -3.7108158206339955e-2, -6.8392230567221039e-2, -1.7148968533311057e-1], [2.9903305478779381e-7, 2.7398036590569883e-6, 7.8912693583318623e-6, 1.6351386917324088e-5, 2.9184155890776926e-5, 4.8194215914106135e-5, 7.6467740603305195e-5, 1.1948549155365498e-4, 1.8758952814241725e-4, 3.0204152838359237e-4, 5.1215309267709807e-4, 9.5460990786689022e-4, 2.1373355091300233e-3, 7.5322047157287341e-3], [-4.1647517279321746e-9, -3.8374581441892341e-8, -1.1180126363086252e-7, -2.3577188146715223e-7, -4.3113425980081547e-7, -7.3488703544009768e-7, -1.2139337160486284e-6, -1.9951840674315680e-6, -3.3371833152263505e-6, -5.8210886699086281e-6, -1.0945348343388687e-5, -2.3442366915594991e-5, -6.4216064056464965e-5, -3.2105578045047764e-4], [2.9748381841379766e-11, 2.7839874579272517e-10, 8.3653832565964922e-10, 1.8470033515415262e-9, 3.5882284802156648e-9, 6.5918600345473704e-9, 1.1904706646914781e-8, 2.1710439510625502e-8, 4.0948612182162325e-8, 8.2088255077881746e-8, 1.8179971234107266e-7, 4.7539293078456770e-7, 1.6921573078565210e-6, 1.2736407522885323e-5], [1.6104612165402845e-12, 1.4694693388984589e-11, 4.1954676261932845e-11, 8.5673982394751290e-11, 1.4949410848268328e-10, 2.3849540104382774e-10, 3.5862552967147233e-10, 5.1337047223982661e-10, 6.8950771438761074e-10, 7.9698527248795750e-10, 3.8655316072807408e-10, -3.0058996883909184e-9, -2.8489409564168478e-8, -4.3622788711526308e-7], [-1.0121309829851655e-13, -9.3090681422145550e-13, -2.7020961059799781e-12, -5.6653769997728623e-12, -1.0274726367526455e-11, -1.7317081194163104e-11, -2.8168439504879230e-11, -4.5315221847826580e-11, -7.3462033506467408e-11, -1.2195715150025772e-10, -2.0971873857595844e-10, -3.6623715589466570e-10, -4.1957794818625877e-10, 1.0928402111543586e-8], [1.8959503542197624e-15, 1.7635462330759673e-14, 5.2361417057681438e-14, 1.1361111242679864e-13, 2.1582418451025882e-13, 3.8596942460028768e-13, 6.7577833116812078e-13, 1.1899046003689951e-12, 2.1563686358966420e-12, 4.1227321344431624e-12, 8.5811379374073960e-12, 2.0299024222209830e-11, 5.6281015961602459e-11, -6.7770857462417577e-11], [1.2473322182970439e-16, 1.1361272615198126e-15, 3.2319544418554078e-15, 6.5617893858294076e-15, 1.1353979976349871e-14, 1.7899672468449878e-14, 2.6462672209994300e-14, 3.6925951948111387e-14, 4.7491533107602009e-14, 4.9688875961017361e-14, 6.8021025758761486e-15, -2.6008479875405318e-13, -1.8899020288485234e-12, -1.1443936672067268e-11], [-1.1468920255350820e-17, -1.0532198123666191e-16, -3.0474628535068725e-16, -6.3580871704821567e-16, -1.1451364054828299e-15, -1.9121044281535927e-15, -3.0721456437849127e-15, -4.8619729975418602e-15, -7.7085667339978636e-15, -1.2396826199822133e-14, -2.0269371142313450e-14, -3.1978116381410383e-14, -2.0200853608217407e-14, 7.3625147747189122e-13], [3.4723606624038862e-19, 3.2119039397636835e-18, 9.4309716667222982e-18, 2.0125603544684127e-17, 3.7397660823005823e-17, 6.5064467310151735e-17, 1.1020818549234903e-16, 1.8661084644228661e-16, 3.2295409162752515e-16, 5.8426315048026165e-16, 1.1339137207269580e-15, 2.4227966019027810e-15, 5.3832367472601296e-15, -2.2743145549596779e-14], [7.5041619640132010e-21, 6.7597548811846809e-20, 1.8777679095050568e-19, 3.6617441102413592e-19, 5.9382169243444831e-19, 8.4143361984048294e-19, 1.0255776491685295e-18, 9.1749869863264020e-19, -1.2211769221411913e-19, -3.9998511033391575e-18, -1.7073822308067129e-17, -6.4352249435449267e-17, -2.6327906592138783e-16, 6.6258871119148226e-17], [-1.2003396863707864e-21, -1.1006977632868512e-20, -3.1752175057595303e-20, -6.5926268737931506e-20, -1.1789819245304719e-19, -1.9488563097807523e-19, -3.0865904431855327e-19, -4.7838117006404665e-19, -7.3457818414479664e-19, -1.1197266556560976e-18, -1.6466343571464665e-18, -1.8929102337550241e-18, 3.0575002245250635e-18, 3.3719370459234670e-17], [4.7407814442979736e-23, 4.3772433812943736e-22, 1.2805538408003897e-21, 2.7172766651702948e-21, 5.0098656332933887e-21, 8.6264313042363975e-21, 1.4417028623769185e-20, 2.3989823023357847e-20, 4.0564262387296209e-20, 7.1027909390751836e-20, 1.3101606425266304e-19, 2.5415893252626487e-19, 4.1520860837798909e-19, -1.9679516958771705e-18]],
        [[6.1909115295531633e-4, 5.6110196963662326e-3, 1.5809088704547750e-2, 3.1667722892711738e-2, 5.3939982804763927e-2, 8.3784013888307377e-2, 1.2294972743348684e-1, 1.7411237229924671e-1, 2.4149906417674487e-1, 3.3215850985093588e-1, 4.5882536251056540e-1, 6.4746097833682096e-1, 9.6253636483038767e-1, 1.6410811522010917e+0], [-1.7700857578076459e-5, -1.6122875055478564e-4, -4.5886937057067240e-4, -9.3352500140208052e-4, -1.6244063110646282e-3, -2.5945976442271734e-3, -3.9450390633044447e-3, -5.8411558082269622e-3, -8.5667373641070727e-3, -1.2642870459524338e-2, -1.9124047241765693e-2, -3.0474017127353657e-2, -5.3960344897356768e-2, -1.2375421960472931e-1], [2.5260741262224173e-7, 2.3123581817223068e-6, 6.6478761488631447e-6, 1.3735554992622132e-5, 2.4416814543958635e-5, 4.0104070195689297e-5, 6.3180556037942356e-5, 9.7808096794410929e-5, 1.5167719340898249e-4, 2.4018622221861692e-4, 3.9784185806259302e-4, 7.1587695805752863e-4, 1.5097856406375053e-3, 4.6574932762789955e-3], [-3.5408356169351532e-9, -3.2577051722985848e-8, -9.4622317034661294e-8, -1.9860653275740864e-7, -3.6079422354784246e-7, -6.0963977202108328e-7, -9.9567145928994875e-7, -1.6126246717026090e-6, -2.6463249248895851e-6, -4.5005531551540098e-6, -8.1719957446856540e-6, -1.6626487223074530e-5, -4.1832119181055269e-5, -1.7395317589762482e-4], [4.3037841277653969e-11, 3.9855185749616966e-10, 1.1729483780340396e-9, 2.5118395475355556e-9, 4.6898891822525621e-9, 8.2103121829487391e-9, 1.4017989590441397e-8, 2.3983120250782351e-8, 4.2098776475239909e-8, 7.7813998993467553e-8, 1.5690545604062880e-7, 3.6600633726686970e-7, 1.1149633500981940e-6, 6.3496678587406823e-6], [-1.4063141386520047e-14, -2.1263836824971323e-13, -1.1128211634157083e-12, -3.9590764843760272e-12, -1.1361652407334390e-11, -2.8731205488773984e-11, -6.7643761466226802e-11, -1.5426298731395822e-10, -3.5246234203554544e-10, -8.3563541102796446e-10, -2.1506365838706447e-9, -6.4564399141719342e-9, -2.6155315890315394e-8, -2.1939539386746691e-7], [-3.5006924718507189e-14, -3.2008467410545194e-13, -9.1785110443855519e-13, -1.8875999709550125e-12, -3.3288654866861960e-12, -5.3945980003379103e-12, -8.3056302159102207e-12, -1.2345984584310293e-11, -1.7740468200560851e-11, -2.3937305408414195e-11, -2.5691486119877458e-11, 1.1956345376199655e-11, 3.8560291469741840e-10, 6.7582224577649570e-9], [1.9239930393200813e-15, 1.7682871519717315e-14, 5.1250582706863262e-14, 1.0720936881193685e-13, 1.9382358636857385e-13, 3.2533286182421175e-13, 5.2644756424307516e-13, 8.4140338404803903e-13, 1.3529228892915923e-12, 2.2228172694763905e-12, 3.7705941849391886e-12, 6.4623116210929306e-12, 7.2850970156338984e-12, -1.6296065088239389e-10], [-5.4713642004339296e-17, -5.0548598172348688e-16, -1.4806669341613618e-15, -3.1483956675656168e-15, -5.8226618543799822e-15, -1.0071108419014520e-14, -1.6941992553253210e-14, -2.8467346431279086e-14, -4.8867956236636635e-14, -8.7736893093058986e-14, -1.6950131467934104e-13, -3.6495899912817992e-13, -8.7585904674633779e-13, 1.6998791959458010e-12], [-2.8934724752701769e-19, -2.4880331145550003e-18, -6.1953442243921305e-18, -9.6453652552919560e-18, -8.9783052685033137e-18, 4.1188980530379388e-18, 4.7983158986975233e-17, 1.6495174924415249e-16, 4.5958660326277894e-16, 1.2157820141375995e-15, 3.3136906381598017e-15, 1.0044545628185025e-14, 3.7174088902186951e-14, 1.0079989531255365e-13], [1.2343453085124440e-19, 1.1288109876643882e-18, 3.2382029983108407e-18, 6.6647592403653028e-18, 1.1770790910161164e-17, 1.9126284524701358e-17, 2.9593382225834203e-17, 4.4409235258031505e-17, 6.5079414881188053e-17, 9.2064109881479717e-17, 1.1648793629295758e-16, 6.5775786440801390e-17, -6.5938402906010359e-16, -7.8505837696341596e-15], [-6.8068759386234522e-21, -6.2561328802082671e-20, -1.8132787736828548e-19, -3.7931839791650213e-19, -6.8573653538775515e-19, -1.1508065443895598e-18, -1.8614456608806360e-18, -2.9726391985858264e-18, -4.7725656894038379e-18, -7.8201183902883620e-18, -1.3204045362535470e-17, -2.2481671678868333e-17, -2.6630598119627736e-17, 3.0813998754732684e-16], [1.6474489989733582e-22, 1.5258006789397446e-21, 4.4913471177873233e-21, 9.6198351779810276e-21, 1.7961337732213870e-20, 3.1429520767370533e-20, 5.3586731818451002e-20, 9.1385031344712217e-20, 1.5931910373934166e-19, 2.9026543758421741e-19, 5.6673851422450040e-19, 1.2165445541233569e-18, 2.7462092970522049e-18, -6.7538603039284973e-18], [3.1482529963569680e-24, 2.8236097517780964e-23, 7.7695423216198233e-23, 1.4902272436668279e-22, 2.3498823298443159e-22, 3.1649127279736137e-22, 3.4491656634598111e-22, 1.9618660166481782e-22, -4.5843845347421173e-22, -2.5547364353641451e-21, -9.0675890238562545e-21, -3.1026301054703898e-20, -1.1556857821721165e-19, -3.5275374284144662e-20]],
        [[5.8558385474626212e-4, 5.3058981655433894e-3, 1.4941157767927586e-2, 2.9903481124723159e-2, 5.0873670532596155e-2, 7.8894011515965591e-2, 1.1552985024317416e-1, 1.6315565008755317e-1, 2.2548611368898859e-1, 3.0863726452145629e-1, 4.2347738602082055e-1, 5.9167215828595380e-1, 8.6529436337381039e-1, 1.4252534308577793e+0], [-1.5838493245050744e-5, -1.4418750705300472e-4, -4.0991661659321447e-4, -8.3250820297581128e-4, -1.4451520597636112e-3, -2.3008711261910648e-3, -3.4837264862202128e-3, -5.1298799402750872e-3, -7.4695265154953370e-3, -1.0917630640793936e-2, -1.6294237697217329e-2, -2.5455007975301958e-2, -4.3623058932136353e-2, -9.3400297925083847e-2], [2.1413356554084102e-7, 1.9585851174821815e-6, 5.6215081811391848e-6, 1.1585139830716842e-5, 2.0520120747993239e-5, 3.3541796338849927e-5, 5.2509695106571415e-5, 8.0622763236306258e-5, 1.2368341368678842e-4, 1.9304261080176031e-4, 3.1338781689528588e-4, 5.4740508728443399e-4, 1.0992858075681105e-3, 3.0594557218408726e-3], [-2.8852583729838484e-9, -2.6515072709378397e-8, -7.6834940994813629e-8, -1.6068760893974900e-7, -2.9042992927693510e-7, -4.8742694752368887e-7, -7.8905292049280668e-7, -1.2633682744238722e-6, -2.0422642952024781e-6, -3.4043287868712753e-6, -6.0126867168693754e-6, -1.1745862601135618e-5, -2.7648535395843541e-5, -1.0006365010797455e-4], [3.7740290339249797e-11, 3.4856251055514060e-10, 1.0203184259190464e-9, 2.1671265019225025e-9, 4.0011854163411577e-9, 6.9039563796485289e-9, 1.1575255269048306e-8, 1.9362624279173760e-8, 3.3051302176833728e-8, 5.8980523442919889e-8, 1.1362761937313857e-7, 2.4895903305708503e-7, 6.8905313572376107e-7, 3.2540559718741327e-6], [-3.9302096171844419e-13, -3.6610834207975491e-12, -1.0902153952343322e-11, -2.3761069496908995e-11, -4.5414424160647983e-11, -8.1858268719232708e-11, -1.4474502848818125e-10, -2.5802714097761011e-10, -4.7497282483091809e-10, -9.2725957712919690e-10, -1.9913341602952179e-9, -4.9978847524501969e-9, -1.6590454626424678e-8, -1.0406668698182069e-7], [-3.1088403367615935e-15, -2.7449940424178446e-14, -7.2862481525952053e-14, -1.3035233208064770e-13, -1.7854270058069868e-13, -1.6766324715411514e-13, 1.9825836451926964e-14, 6.7236220454738399e-13, 2.5446603377211364e-12, 7.8121133752277709e-12, 2.3711510354027712e-11, 8.0226922980153353e-11, 3.5702790058131187e-10, 3.1965420993259083e-9], [5.1557308932839417e-16, 4.7151121659013532e-15, 1.3526763235262305e-14, 2.7839294322518951e-14, 4.9153516957997402e-14, 7.9799616369978489e-14, 1.2320653054616733e-13, 1.8397761961431248e-13, 2.6649456359170496e-13, 3.6564584603104854e-13, 4.1409304751416025e-13, -6.0647293215528921e-14, -5.1201947165907242e-12, -9.0102197868174473e-11], [-2.7135886096443785e-17, -2.4914843692911208e-16, -7.2063956751217131e-16, -1.5027314269531067e-15, -2.7048539824868491e-15, -4.5136221191350224e-15, -7.2484873080341156e-15, -1.1471129159375968e-14, -1.8206096110240513e-14, -2.9381307038424012e-14, -4.8515086183672648e-14, -7.9038725067693687e-14, -6.8861052885984468e-14, 2.1188578964924097e-12], [9.3497031977212888e-19, 8.6108379839775011e-18, 2.5062962695527657e-17, 5.2777138326801276e-17, 9.6316709131103957e-17, 1.6374625135054824e-16, 2.6955020618592616e-16, 4.4089602316245727e-16, 7.3204605431281199e-16, 1.2605203258152907e-15, 2.3068161292106715e-15, 4.6020846181626040e-15, 9.6045302914589370e-15, -3.0119842388815126e-14], [-1.5482687239073770e-20, -1.4395653329469455e-19, -4.2707239656120055e-19, -9.2548125288902791e-19, -1.7550974006191393e-18, -3.1317646119160093e-18, -5.4681272269178328e-18, -9.5961032516570654e-18, -1.7322582740992932e-17, -3.2977400279477542e-17, -6.8369738081445663e-17, -1.6165091885104545e-16, -4.5954107133361405e-16, -5.1842801396578029e-16], [-5.4985900424079559e-22, -4.9743528193151111e-21, -1.3948018384444709e-20, -2.7650379124024012e-20, -4.6107171556898691e-20, -6.8634007414171191e-20, -9.2346398308297577e-20, -1.0800666022724558e-19, -8.7628370483836613e-20, 5.6452855924383782e-20, 6.2761532101819112e-19, 2.8743612808707365e-18, 1.3492097935246392e-17, 6.0997668228006966e-17], [5.7570223769812183e-23, 5.2693120396609756e-22, 1.5142993937627322e-21, 3.1256654848213378e-21, 5.5439549766476825e-21, 9.0643166928555860e-21, 1.4152664345521169e-20, 2.1533438441903928e-20, 3.2278926587210230e-20, 4.7644470244615502e-20, 6.6919991429712373e-20, 7.0483592488272062e-20, -1.3774861908793345e-19, -2.7701259755941346e-18], [-2.5245257810595559e-24, -2.3201845687062192e-23, -6.7243148669652793e-23, -1.4064745374523106e-22, -2.5421434368360151e-22, -4.2650127266012745e-22, -6.8959286262074135e-22, -1.1006526540111279e-21, -1.7659612226382401e-21, -2.8921900557478333e-21, -4.8875344842308673e-21, -8.3971734210610476e-21, -1.1091890292874926e-20, 8.2945850604426942e-20]],
        [[5.5551714401872400e-4, 5.0322474721190386e-3, 1.4163561756727000e-2, 2.8325431899181235e-2, 4.8137213876789985e-2, 7.4543325768900386e-2, 1.0895457095756608e-1, 1.5349633081958567e-1, 2.1146481079791450e-1, 2.8822742331988597e-1, 3.9318748477282281e-1, 5.4473824971392690e-1, 7.8590931537039066e-1, 1.2596613323650541e+0], [-1.4254257053767166e-5, -1.2970236955068055e-4, -3.6837180812968662e-4, -7.4698686378763713e-4, -1.2939122149962085e-3, -2.0541784237628723e-3, -3.0985905804292771e-3, -4.5406531459568917e-3, -6.5697896111759522e-3, -9.5219869617290797e-3, -1.4047653715107322e-2, -2.1578787064604539e-2, -3.5990921680725872e-2, -7.2977449799342060e-2], [1.8287094409205119e-7, 1.6714247487785245e-6, 4.7901960041166022e-6, 9.8492321416681108e-6, 1.7389281960642067e-5, 2.8302221198310302e-5, 4.4059126013066848e-5, 6.7157044145653830e-5, 1.0205110202991953e-4, 1.5727971214227336e-4, 2.5093467717192013e-4, 4.2738461469442675e-4, 8.2407371304890855e-4, 2.1138582435788163e-3], [-2.3448564500364520e-9, -2.1527725172430113e-8, -6.2257906038534337e-8, -1.2979831073157621e-7, -2.3358218138297476e-7, -3.8975272553454687e-7, -6.2618126789790859e-7, -9.9280702193761771e-7, -1.5845024086166048e-6, -2.5967934078143144e-6, -4.4807399839420606e-6, -8.4617087861897777e-6, -1.8862762310859448e-5, -6.1214508347852295e-5], [2.9910575179784559e-11, 2.7584539063337671e-10, 8.0506446227755885e-10, 1.7021136460192066e-9, 3.1226821673864325e-9, 5.3429876258472351e-9, 8.8614771272636429e-9, 1.4618894716493755e-8, 2.4513097318588223e-8, 4.2737092375789162e-8, 7.9787322794772073e-8, 1.6714936939872063e-7, 4.3100939284194372e-7, 1.7706795671391123e-6], [-3.6620372940827493e-13, -3.3943530622576553e-12, -1.0008182489800283e-11, -2.1492373026721974e-11, -4.0280248564020717e-11, -7.0852092914531990e-11, -1.2166380858365167e-10, -2.0952938322339319e-10, -3.7046251927045436e-10, -6.8971594973532896e-10, -1.3987249336117046e-9, -3.2636103500606707e-9, -9.7726581596369771e-9, -5.1012444388011443e-8], [3.2751036792435051e-15, 3.0716484877912902e-14, 9.2701858947026176e-14, 2.0603988469510991e-13, 4.0389430296207934e-13, 7.5054205281788035e-13, 1.3746726544748352e-12, 2.5494469683948607e-12, 4.9033669931822506e-12, 1.0046909323120567e-11, 2.2762997599816941e-11, 6.0657716355698304e-11, 2.1544491274967139e-10, 1.4526316773472974e-9], [5.2076994081424983e-17, 4.6580219230685866e-16, 1.2734357592016785e-15, 2.4107463450999112e-15, 3.7006421447967945e-15, 4.6832858905962050e-15, 4.1849107831172840e-15, -8.4502014851664950e-16, -1.8755329544718809e-14, -7.4529486321512393e-14, -2.5406581615700522e-13, -9.2407365688989900e-13, -4.3395266393083726e-12, -4.0204904130517250e-11], [-5.7523607637873457e-18, -5.2584723814471344e-17, -1.5072085078156842e-16, -3.0975876131950325e-16, -5.4579709766394991e-16, -8.8353712901459778e-16, -1.3585315599670346e-15, -2.0161104494345303e-15, -2.8903793440381593e-15, -3.8830972328095411e-15, -4.1061029282202762e-15, 2.2904819610590265e-15, 6.4039366824055429e-14, 1.0461793651710285e-12], [2.9485521257195694e-19, 2.7044949972605927e-18, 7.8064593191058641e-18, 1.6226712403814625e-17, 2.9076648216612513e-17, 4.8229010734514931e-17, 7.6837502783860943e-17, 1.2032269729535047e-16, 1.8824397993127763e-16, 2.9756307884615654e-16, 4.7499854434064893e-16, 7.1800199061760437e-16, 2.8830476994304026e-16, -2.3929533424001474e-14], [-1.1095351874414433e-20, -1.0198687264761004e-19, -2.9567511036507815e-19, -6.1884403454354639e-19, -1.1198598845387010e-18, -1.8827301987522812e-18, -3.0550710902224726e-18, -4.9063880731427240e-18, -7.9571745333291109e-18, -1.3286033483776563e-17, -2.3304869840621924e-17, -4.3543026844733242e-17, -7.8307512930889346e-17, 4.0090991893166055e-16], [2.9021477189203763e-22, 2.6767328671348383e-21, 7.8141867962575819e-21, 1.6530155187516782e-20, 3.0356937805372461e-20, 5.2034311530927447e-20, 8.6556990914386487e-20, 1.4347077312693827e-19, 2.4231034206303530e-19, 4.2682747313743775e-19, 8.0707809891087467e-19, 1.7016623296109933e-18, 4.0949539360507741e-18, -3.1394513598648436e-19], [-2.5574322310946702e-24, -2.4118055524917947e-23, -7.3532308290856482e-23, -1.6562528045249288e-22, -3.2941752606567960e-22, -6.2050846824248530e-22, -1.1484768771306076e-21, -2.1411871016214931e-21, -4.1091841649465716e-21, -8.3156462801246963e-21, -1.8330020300176434e-20, -4.6235928960025196e-20, -1.4324582506017145e-19, -3.4874678177576693e-19], [-2.3385820692183993e-25, -2.1245306692870414e-24, -6.0109778069983307e-24, -1.2098371309116653e-23, -2.0667782712363557e-23, -3.1987781930592832e-23, -4.6027884117332104e-23, -6.1558985902362889e-23, -7.3250058852739670e-23, -6.1545201121516227e-23, 4.7516637800452849e-23, 5.7651290540141848e-22, 3.3444405718124652e-21, 1.8627887798357053e-20]],
        [[5.2838788709440585e-4, 4.7854458095998356e-3, 1.3462918965433966e-2, 2.6905626095068903e-2, 4.5680188970297106e-2, 7.0647534982127822e-2, 1.0308765470930419e-1, 1.4491716443993765e-1, 1.9908578991158141e-1, 2.7035057442661544e-1, 3.6694341809938060e-1, 5.0470732796432242e-1, 7.1987727295138667e-1, 1.1285867418171107e+0], [-1.2896234518749829e-5, -1.1729416021458420e-4, -3.3283403931668799e-4, -6.7399122180183132e-4, -1.1652182729064947e-3, -1.8451167830646172e-3, -2.7739373032614803e-3, -4.0473725054247136e-3, -5.8232923371908086e-3, -8.3777383105691546e-3, -1.2235495429428802e-2, -1.8524896636686682e-2, -3.0199727451914776e-2, -5.8590143627864715e-2], [1.5737689732877348e-7, 1.4374685950633785e-6, 4.1141888852876564e-6, 8.4417670575785505e-6, 1.4861226945697282e-5, 2.4094542733759560e-5, 3.7321114459463884e-5, 5.6519004710974870e-5, 8.5165734950945065e-5, 1.2980584703317875e-4, 2.0399145767961427e-4, 3.3996948169817749e-4, 6.3345464873020337e-4, 1.5208350017447777e-3], [-1.9203874802247101e-9, -1.7615310054904718e-8, -5.0852336598768050e-8, -1.0572630471319218e-7, -1.8952788322080453e-7, -3.1461920025112077e-7, -5.0209403042111873e-7, -7.8920399107359817e-7, -1.2454771747533066e-6, -2.0111183456541113e-6, -3.4007906824510173e-6, -6.2388348070075129e-6, -1.3286476409186163e-5, -3.9475224545331844e-5], [2.3415435446474692e-11, 2.1570014025850643e-10, 6.2807463619146998e-10, 1.3231667183958832e-9, 2.4153733897924463e-9, 4.1054247345882255e-9, 6.7505350593393738e-9, 1.1013511564197619e-8, 1.8204144122776396e-8, 3.1143632416656485e-8, 5.6671357821897057e-8, 1.1444937581688000e-7, 2.7860223417589447e-7, 1.0244401920541192e-6], [-2.8359570004717713e-13, -2.6237980387660708e-12, -7.7073059593247692e-12, -1.6456697264676065e-11, -3.0600651368518128e-11, -5.3276535516605768e-11, -9.0301478957304265e-11, -1.5299955163799991e-10, -2.6502022268929154e-10, -4.8066167594009169e-10, -9.4180952654212929e-10, -2.0951884830651694e-9, -5.8336852709772086e-9, -2.6564961242258664e-8], [3.2707872587435795e-15, 3.0417541882456756e-14, 9.0284783112334588e-14, 1.9585140455307212e-13, 3.7210637806812446e-13, 6.6603698430891646e-13, 1.1685404651936741e-12, 2.0654423055196530e-12, 3.7671212697087539e-12, 7.2781981236572746e-12, 1.5428530254274853e-11, 3.7976917687541068e-11, 1.2142475060000086e-10, 6.8701165025861589e-10], [-2.5989912005298850e-17, -2.4539621776463615e-16, -7.5032246467196892e-16, -1.6990963510011689e-15, -3.4096791873875710e-15, -6.5117860259046879e-15, -1.2296880826534082e-14, -2.3577849398902686e-14, -4.7005607501883772e-14, -1.0012144271111241e-13, -2.3664491466709385e-13, -6.6089619772163190e-13, -2.4742662749061140e-12, -1.7629937087396992e-11], [-5.3980818263928220e-19, -4.8347734476326085e-18, -1.3256079649516144e-17, -2.5223268947403416e-17, -3.9060943714452717e-17, -5.0282853606651078e-17, -4.7180843091282365e-17, 1.2267064630326151e-18, 1.8112912340821799e-16, 7.5462680504572698e-16, 2.6379208120638148e-15, 9.8097711248206637e-15, 4.7131732899215868e-14, 4.4378646643006697e-13], [5.1058632769232246e-20, 4.6638770352081935e-19, 1.3346337585359997e-18, 2.7358206008482472e-18, 4.8020486872993596e-18, 7.7301875569131259e-18, 1.1787469948303834e-17, 1.7264549026267069e-17, 2.4180569481863421e-17, 3.0845709259608367e-17, 2.6566142644980495e-17, -5.2991014797512957e-17, -7.2106639689648012e-16, -1.0705201669890510e-14], [-2.5563083214510204e-21, -2.3424730041650223e-20, -6.7482397684128050e-20, -1.3984135812832908e-19, -2.4949636741582118e-19, -4.1140267072609313e-19, -6.5026819058276871e-19, -1.0073801089548316e-18, -1.5522759593525754e-18, -2.3973664648526014e-18, -3.6697734969788260e-18, -4.9536020279028776e-18, 2.2497489361876877e-18, 2.3625630612736028e-16], [9.9848365145397480e-23, 9.1649752244337993e-22, 2.6494301189671276e-21, 5.5205590582216000e-21, 9.9279617064421639e-21, 1.6553168924020835e-20, 2.6571557351906311e-20, 4.2078331381553449e-20, 6.6994940826412994e-20, 1.0909404003208892e-19, 1.8450379852858009e-19, 3.2372137987310889e-19, 4.8083294271463609e-19, -4.2816693478912407e-18], [-3.0674541301020528e-24, -2.8210317682505510e-23, -8.1873302589023318e-23, -1.7164555909860539e-22, -3.1134287411605564e-22, -5.2511479590230863e-22, -8.5577335214031955e-22, -1.3824571095527177e-21, -2.2608137749796030e-21, -3.8228930530330816e-21, -6.8519698770818634e-21, -1.3396190020070894e-20, -2.8163203904812606e-20, 3.9857098567372707e-20], [6.4973400523900065e-26, 6.0001490675702558e-25, 1.7560048081911301e-24, 3.7286555362498466e-24, 6.8821506706979979e-24, 1.1871881560269662e-23, 1.9901934978681322e-23, 3.3294427327305741e-23, 5.6853024564742195e-23, 1.0148748810683582e-22, 1.9521438238221663e-22, 4.2237312308581090e-22, 1.0784561250865017e-21, 1.3047911352043647e-21]],
        [[5.0378568676535327e-4, 4.5617267963192933e-3, 1.2828345335648286e-2, 2.5621398740706568e-2, 4.3461875154678981e-2, 6.7138840450243431e-2, 9.7820480947216366e-2, 1.3724655335684819e-1, 1.8807645141994928e-1, 2.5456265612681792e-1, 3.4398514199562009e-1, 4.7016027480432756e-1, 6.6408879884449835e-1, 1.0222463699009238e+0], [-1.1723433608804745e-5, -1.0658501871799218e-4, -3.0220159174849159e-4, -6.1119548541132329e-4, -1.0548123407268833e-3, -1.6664211373294180e-3, -2.4977606944585302e-3, -3.6303227402782431e-3, -5.1971708987612751e-3, -7.4280275945113969e-3, -1.0752698423272842e-2, -1.6076366321766518e-2, -2.5702005335988467e-2, -4.8074915114622397e-2], [1.3640604760221290e-7, 1.2451820546161644e-6, 3.5595299018094444e-6, 7.2899950421745841e-6, 1.2800052096593263e-5, 2.0680712053213305e-5, 3.1889055256534563e-5, 4.8012997200603646e-5, 7.1807427088477719e-5, 1.0837325426407488e-4, 1.6806026261873353e-4, 2.7485247115150654e-4, 4.9736778581208957e-4, 1.1304497498770437e-3], [-1.5871170291729503e-9, -1.4546753608224626e-8, -4.1926162478854436e-8, -8.6950270698453227e-8, -1.5532627872854700e-7, -2.5665099100952815e-7, -4.0712643400700270e-7, -6.3499356734568410e-7, -9.9213046387526294e-7, -1.5811312403745253e-6, -2.6266970375802219e-6, -4.6990382854791566e-6, -9.6246765471531429e-6, -2.6581665961939112e-5], [1.8464679158759835e-11, 1.6992494259129412e-10, 4.9378291836493135e-10, 1.0369889281255335e-9, 1.8846857197131882e-9, 3.1848051345390306e-9, 5.1973433157629464e-9, 8.3974344517026885e-9, 1.3706850241932161e-8, 2.3066739661658171e-8, 4.1051668358079666e-8, 8.0333740419113567e-8, 1.8624239605544007e-7, 6.2503158626824143e-7], [-2.1461686266345267e-13, -1.9830892122008487e-12, -5.8101941663861945e-12, -1.2356490588647921e-11, -2.2849119433863033e-11, -3.9489555147538568e-11, -6.6300966138477021e-11, -1.1097898678740882e-10, -1.8925921837766160e-10, -3.3634990308069720e-10, -6.4132296107030768e-10, -1.3729408781324698e-9, -3.6030978176898164e-9, -1.4694913209099997e-8], [2.4758783178814227e-15, 2.2973215582647786e-14, 6.7879793778330552e-14, 1.4623783300214697e-13, 2.7525530100575051e-13, 4.8679766567402387e-13, 8.4137475352791353e-13, 1.4600119865133082e-12, 2.6031920789150017e-12, 4.8892598090034843e-12, 9.9950450211832173e-12, 2.3424480544578263e-11, 6.9632960733665465e-11, 3.4531249732564081e-10], [-2.7131178663068744e-17, -2.5306203307587107e-16, -7.5561713805357936e-16, -1.6539434291340079e-15, -3.1807656233159128e-15, -5.7817866487533713e-15, -1.0337897758397988e-14, -1.8693671453800670e-14, -3.5031634726555086e-14, -6.9891192616238480e-14, -1.5391832241816235e-13, -3.9656567582705759e-13, -1.3399527647473133e-12, -8.1005639537149187e-12], [2.0315519686772877e-19, 1.9276452742354997e-18, 5.9501194202423765e-18, 1.3656305668644770e-17, 2.7866479286507243e-17, 5.4258203317176310e-17, 1.0469159171955360e-16, 2.0552033134759165e-16, 4.2041176424012801e-16, 9.2122305115794894e-16, 2.2476226946195635e-15, 6.5085020101693902e-15, 2.5399877501745492e-14, 1.8909027271082028e-13], [4.1281470193422297e-21, 3.6851070497722774e-20, 1.0027428967419010e-19, 1.8804984217466328e-19, 2.8305467874527551e-19, 3.4122091241961011e-19, 2.4995988427710991e-19, -2.8573752609067335e-19, -2.0846585424058758e-18, -7.6443586722690360e-18, -2.5758582721014308e-17, -9.5011466367814729e-17, -4.5924583433559308e-16, -4.3590271481710552e-15], [-3.7135805403195260e-22, -3.3885357057405426e-21, -9.6752918105709770e-21, -1.9761376353195556e-20, -3.4496415367800236e-20, -5.5076564737724751e-20, -8.2923516303255454e-20, -1.1891200699061775e-19, -1.5994365816805098e-19, -1.8410803212492554e-19, -7.9534272325393086e-20, 7.7720560008325997e-19, 7.1723185544486179e-18, 9.7682980829798854e-17], [1.8193792135666562e-23, 1.6656514110801786e-22, 4.7893534469929198e-22, 9.8952670590203037e-22, 1.7579420888296937e-21, 2.8817364226384194e-21, 4.5182973242876616e-21, 6.9207960867521715e-21, 1.0486649024271072e-20, 1.5752832421627986e-20, 2.2782821969533023e-20, 2.5149361909551556e-20, -5.9084726482383564e-20, -2.0623944278689487e-18], [-7.1856553262771422e-25, -6.5881878208649103e-24, -1.9001363642670184e-23, -3.9450903386263534e-23, -7.0590278373148897e-23, -1.1690379474024442e-22, -1.8599192950248258e-22, -2.9109212975055131e-22, -4.5618600923981448e-22, -7.2643276578391179e-22, -1.1863725484546704e-21, -1.9418200829716842e-21, -2.0922307866962079e-21, 3.8391551497895334e-20], [2.3634963193819861e-26, 2.1698826437024955e-25, 6.2754870382122921e-25, 1.3085299008946703e-24, 2.3556669937550585e-24, 3.9336132773850231e-24, 6.3283188984059894e-24, 1.0055092128015167e-23, 1.6095773773972699e-23, 2.6459767266393405e-23, 4.5607285401731984e-23, 8.3912169248477846e-23, 1.5388333591901147e-22, -5.1872930794419163e-22]],
        [[4.8137310011740279e-4, 4.3579961928323091e-3, 1.2250914523117608e-2, 2.4454211075509737e-2, 4.1449088837856299e-2, 6.3962265487981633e-2, 9.3065536860279845e-2, 1.3034739048842897e-1, 1.7822132310398681e-1, 2.4051761998907640e-1, 3.2373170130698418e-1, 4.4004196137802599e-1, 6.1633047756644046e-1, 9.3423695167602704e-1], [-1.0703650919579462e-5, -9.7278417955066365e-5, -2.7561178985183123e-4, -5.5678469442975179e-4, -9.5938749228978348e-4, -1.5124845802273362e-3, -2.2608707542956726e-3, -3.2745715009597510e-3, -4.6668726495002807e-3, -6.6311346089905886e-3, -9.5240285781214964e-3, -1.4083155187818847e-2, -2.2139333613988106e-2, -4.0156977902614451e-2], [1.1900139178858309e-7, 1.0857157450545175e-6, 3.1002524377218961e-6, 6.3385643642928162e-6, 1.1103070586305024e-5, 1.7882492772450224e-5, 2.7462025716816685e-5, 4.1131694245946856e-5, 6.1102955993768313e-5, 9.1411066224592888e-5, 1.4009612868472039e-4, 2.2535947508569392e-4, 3.9763575542450957e-4, 8.6304807134158985e-4], [-1.3230363898919604e-9, -1.2117566709985020e-8, -3.4873535029352581e-8, -7.2159609439369212e-8, -1.2849665067688041e-7, -2.1142913153770646e-7, -3.3357160663613370e-7, -5.1665234366977344e-7, -8.0001510642512945e-7, -1.2601127791906414e-6, -2.0607784628964557e-6, -3.6062134465449613e-6, -7.1417737571655636e-6, -1.8548498524623902e-5], [1.4709123329069861e-11, 1.3524150311430990e-10, 3.9227465151862737e-10, 8.2147226861231590e-10, 1.4870861220786764e-9, 2.4997546081946450e-9, 4.0517401239367543e-9, 6.4895780185036654e-9, 1.0474437074290236e-8, 1.7370684059365463e-8, 3.0313334433241900e-8, 5.7706492492207714e-8, 1.2826992934991201e-7, 3.9864028576855066e-7], [-1.6351269015468025e-13, -1.5092278049592708e-12, -4.4120038199970308e-12, -9.3507118045235534e-12, -1.7208208682714021e-11, -2.9552067026647451e-11, -4.9210207733469850e-11, -8.1507812048361793e-11, -1.3712982510992347e-10, -2.3944043386277531e-10, -4.4587568544188543e-10, -9.2337989673172498e-10, -2.3037272056294844e-9, -8.5673413674392102e-9], [1.8158411975299056e-15, 1.6825496453655495e-14, 4.9575004307486382e-14, 1.0634002919659748e-13, 1.9895751043734104e-13, 3.4908678089473267e-13, 5.9725283177072850e-13, 1.0230793998650726e-12, 1.7943245253767020e-12, 3.2990422685639613e-12, 6.5561045539254790e-12, 1.4771654558616898e-11, 4.1368379808741637e-11, 1.8410951618332297e-10], [-2.0015954907565852e-17, -1.8621452747631383e-16, -5.5314789760245852e-16, -1.2013624178987074e-15, -2.2862951831823843e-15, -4.1009952854339104e-15, -7.2138355730069620e-15, -1.2789103873400793e-14, -2.3399988033503994e-14, -4.5336232029362688e-14, -9.6216686925347233e-14, -2.3600781450451231e-13, -7.4231626175309204e-13, -3.9552269920061697e-12], [2.1021040109341958e-19, 1.9657430083375884e-18, 5.8998296217572574e-18, 1.3014897820372960e-17, 2.5293822694142043e-17, 4.6595516546796968e-17, 8.4690591164747246e-17, 1.5619420094132802e-16, 2.9965736161218665e-16, 6.1470372098308091e-16, 1.3991448125923570e-15, 3.7495284966564702e-15, 1.3281661936483706e-14, 8.4881961174415718e-14], [-1.5715990113824843e-21, -1.4944810927656427e-20, -4.6329169011004548e-20, -1.0700211206266738e-19, -2.2013633716124807e-19, -4.3294468329638704e-19, -8.4543432799839429e-19, -1.6833237514862660e-18, -3.5014554085097102e-18, -7.8265031205575251e-18, -1.9555027520373153e-17, -5.8269270314459191e-17, -2.3526147334942575e-16, -1.8161181722357681e-15], [-2.4144963246398593e-23, -2.1359161811073006e-22, -5.6907053638280021e-22, -1.0235848884672068e-21, -1.4104716557370690e-21, -1.3238035881817326e-21, 2.3890390950881054e-22, 5.8543015818449764e-21, 2.2608942101224763e-20, 7.2080649861455011e-20, 2.3053057681979370e-19, 8.3521051247105279e-19, 4.0383509573925076e-18, 3.8555190188001557e-17], [2.2574486548453422e-24, 2.0569361650728213e-23, 5.8555367761370253e-23, 1.1900146449321091e-22, 2.0613194661849053e-22, 3.2518005620346472e-22, 4.8016587730234230e-22, 6.6515049628449350e-22, 8.3111000693185757e-22, 7.5274615968395261e-22, -5.8502879207807787e-22, -8.5393730000947589e-21, -6.3092940889367910e-20, -8.0383413714290379e-19], [-1.0868163786312869e-25, -9.9406831378928983e-25, -2.8528677517338252e-24, -5.8765049426994723e-24, -1.0394204611202370e-23, -1.6933972125052911e-23, -2.6319913497339223e-23, -3.9801566032741738e-23, -5.9099217978020887e-23, -8.5567223206153100e-23, -1.1326510811406854e-22, -7.5566833397971918e-23, 7.0999235761310976e-22, 1.6122934644862135e-20], [4.2764160677345018e-27, 3.9170611795262467e-26, 1.1275006846409636e-25, 2.3336987670928600e-25, 4.1575105264312170e-25, 6.8445784090736789e-25, 1.0803909890215085e-24, 1.6730089108293485e-24, 2.5833675525273511e-24, 4.0239746316725349e-24, 6.3264246461573275e-24, 9.4502027141393131e-24, 4.0839261446642762e-24, -2.9839936623402553e-22]],
        [[4.6087020348590423e-4, 4.1716891541807084e-3, 1.1723238913969503e-2, 2.3388757024433393e-2, 3.9614524822694793e-2, 6.1072774055932945e-2, 8.8751547453520332e-2, 1.2410883769335341e-1, 1.6934788351119290e-1, 2.2794186665489170e-1, 3.0573150940648819e-1, 4.1355171767599979e-1, 5.7498402972553467e-1, 8.6019137233667371e-1], [-9.8113786988593703e-6, -8.9139709293521296e-5, -2.5238331222892678e-4, -5.0932976598562728e-4, -8.7635085202226024e-4, -1.3789354469450028e-3, -2.0561539717660639e-3, -2.9686678842278338e-3, -4.2137949473612582e-3, -5.9559446578273745e-3, -8.4945580806046696e-3, -1.2438970102289904e-2, -1.9269346375604247e-2, -3.4046120600496674e-2], [1.0443629341543474e-7, 9.5235855886380679e-7, 2.7167123569480767e-6, 5.5457587855405601e-6, 9.6932983074552052e-6, 1.5567190034961404e-5, 2.3818002391598776e-5, 3.5505082216594032e-5, 5.2424829352486878e-5, 7.7812113123248692e-5, 1.1800798164377564e-4, 1.8707210002986683e-4, 3.2288523599910500e-4, 6.7376769901488350e-4], [-1.1116621724198941e-9, -1.0174890221077772e-8, -2.9243318085831341e-8, -6.0384136740072954e-8, -1.0721736051511773e-7, -1.7574237345627194e-7, -2.7590209984906125e-7, -4.2463853392361220e-7, -6.5222978056495765e-7, -1.0165850961692905e-6, -1.6393887455641455e-6, -2.8134136845588101e-6, -5.4103999417030572e-6, -1.3333762705865373e-5], [1.1832969115878408e-11, 1.0870724862610649e-10, 3.1478148051615343e-10, 6.5748264505324519e-10, 1.1859276756031357e-9, 1.9840029982951839e-9, 3.1959816284607770e-9, 5.0786455335893996e-9, 8.1145393914063335e-9, 1.3281280462858586e-8, 2.2774677321159038e-8, 4.2311451675607448e-8, 9.0658880967195248e-8, 2.6387309607801505e-7], [-1.2595318958110014e-13, -1.1614001292084683e-12, -3.3883355364088939e-12, -7.1588062909394560e-12, -1.3117359228437750e-11, -2.2397707001491760e-11, -3.7021096166848854e-11, -6.0739681926604234e-11, -1.0095402853644848e-10, -1.7351345187482748e-10, -3.1638799696401903e-10, -6.3632686057591416e-10, -1.5191122785759023e-9, -5.2219967178005411e-9], [1.3405183176541734e-15, 1.2406638386714211e-14, 3.6468173161410394e-14, 7.7938036505350365e-14, 1.4507413058943012e-13, 2.5282706768188658e-13, 4.2880217712775869e-13, 7.2638052965019962e-13, 1.2559003692198506e-12, 2.2667466796175738e-12, 4.3951059720442342e-12, 9.5694953365229293e-12, 2.5454258984052848e-11, 1.0334116425580968e-10], [-1.4253450628396749e-17, -1.3240900371107444e-16, -3.9214567748213061e-16, -8.4778472853073391e-16, -1.6032024164510321e-15, -2.8518792185831896e-15, -4.9635121777027343e-15, -8.6820042183955770e-15, -1.5616799123287789e-14, -2.9601878957622016e-14, -6.1038617858237922e-14, -1.4388652433010248e-13, -4.2646646695720567e-13, -2.0449810607066801e-12], [1.5054886695401806e-19, 1.4039557587919965e-18, 4.1905914448437935e-18, 9.1683800436886713e-18, 1.7623046309224078e-17, 3.2017956127875562e-17, 5.7221971269144651e-17, 1.0342310962841030e-16, 1.9367390662742934e-16, 3.8580267216152998e-16, 8.4650858411423745e-16, 2.1615593307898430e-15, 7.1417351102667658e-15, 4.0460023175299443e-14], [-1.5256172448651736e-21, -1.4297657724881308e-20, -4.3100468835195422e-20, -9.5712443103473605e-20, -1.8769229053744234e-19, -3.4975023278172313e-19, -6.4475284506843257e-19, -1.2096206984485994e-18, -2.3685557945662834e-18, -4.9782315740437747e-18, -1.1662941292385324e-17, -3.2348329010781736e-17, -1.1937723850488435e-16, -8.0001838715103244e-16], [1.1785149236876891e-23, 1.1207492060463759e-22, 3.4753813950274525e-22, 8.0337936978696952e-22, 1.6559100042297041e-21, 3.2676543204389935e-21, 6.4150317923060985e-21, 1.2873053234681762e-20, 2.7069301482009760e-20, 6.1389941973411632e-20, 1.5630496630113402e-19, 4.7699993120163081e-19, 1.9827651999935181e-18, 1.5790662017844073e-17], [1.0370212882362570e-25, 8.9591956412106816e-25, 2.2520302373768274e-24, 3.5548248800149089e-24, 3.3547593020438661e-24, -1.7262458933582825e-24, -1.9787860085239216e-23, -7.1283856798453600e-23, -2.1198628906344309e-22, -6.1143368787032033e-22, -1.8710593891465479e-21, -6.6712833332715677e-21, -3.2283123526357037e-20, -3.1021876307470942e-19], [-1.1616128702712156e-26, -1.0563111824529602e-25, -2.9940606403482239e-25, -6.0404957283463338e-25, -1.0341828135053014e-24, -1.6009957427703817e-24, -2.2887014085453557e-24, -2.9759213050443362e-24, -3.1613811515288157e-24, -9.0949914956816051e-25, 1.1884828739876602e-23, 7.6523814761591822e-23, 4.9575533366415662e-22, 6.0270712475471346e-21], [5.5359843762526045e-28, 5.0582377540353481e-27, 1.4485993670592229e-26, 2.9741330982402190e-26, 5.2349528097362170e-26, 8.4688359695228028e-26, 1.3026724959789892e-25, 1.9384597320545025e-25, 2.7999986742095637e-25, 3.8313368271170343e-25, 4.2781459534179900e-25, -1.3992442845240703e-25, -6.3558065594331893e-24, -1.1425057006103289e-22]],
        [[4.4204284576264138e-4, 4.0006617289004429e-3, 1.1239151969130046e-2, 2.2412288421905858e-2, 3.7935510530466749e-2, 5.8433122229861603e-2, 8.4819877936197917e-2, 1.1844032419819629e-1, 1.6131637063527642e-1, 2.1661623145496774e-1, 2.8962823786056761e-1, 3.9007097798165666e-1, 5.3883883258299340e-1, 7.9702851917946020e-1], [-9.0262102962443427e-6, -8.1981333308189581e-5, -2.3197253087841316e-4, -4.6769355786206860e-4, -8.0364710723908059e-4, -1.2623259411617777e-3, -1.8780368060558887e-3, -2.7037150396661491e-3, -3.8236396876607813e-3, -5.3788771697941753e-3, -7.6234365267415147e-3, -1.1066820861855351e-2, -1.6923416302516011e-2, -2.9231375094549848e-2], [9.2154497089893771e-8, 8.3997841661575471e-7, 2.3939197198029352e-6, 4.8798511754012376e-6, 8.5124552660962162e-6, 1.3634961819849327e-5, 2.0791248051918482e-5, 3.0859739125763828e-5, 4.5315365077175483e-5, 6.6782436857165907e-5, 1.0032996935743148e-4, 1.5699004907255831e-4, 2.6575851807656197e-4, 5.3603683499879072e-4], [-9.4086565690501964e-10, -8.6063949856022713e-9, -2.4704871594031030e-8, -5.0915705262678591e-8, -9.0166310011649845e-8, -1.4727747932885794e-7, -2.3017439893203535e-7, -3.5222776050073066e-7, -5.3704911248687321e-7, -8.2914959911087245e-7, -1.3204153619703189e-6, -2.2270059035605036e-6, -4.1733647845593495e-6, -9.8296945146944982e-6], [9.6059131617696545e-12, 8.8180869751499362e-11, 2.5495032942173368e-10, 5.3124751199204841e-10, 9.5506671765506468e-10, 1.5908114943962935e-9, 2.5481995741798442e-9, 4.0202668223966209e-9, 6.3647667255565058e-9, 1.0294458294595992e-8, 1.7377625384962973e-8, 3.1591524835246611e-8, 6.5536837723851923e-8, 1.8025420053340002e-7], [-9.8072932583173089e-14, -9.0349749631588138e-13, -2.6310435464161284e-12, -5.5429575549622856e-12, -1.0116322020385093e-11, -1.7183065475456061e-11, -2.8210412608287027e-11, -4.5886590390307306e-11, -7.5431133381402489e-11, -1.2781263846663013e-10, -2.2870204000025101e-10, -4.4814608218179505e-10, -1.0291637110853619e-9, -3.3054505869811705e-9], [1.0012768806549745e-15, 9.2570823134584342e-15, 2.7151588386552212e-14, 5.7833724803042210e-14, 1.0715361679866002e-13, 1.8560008617433231e-13, 3.1230680291115749e-13, 5.2373687707449153e-13, 8.9395511532681679e-13, 1.5868707216261927e-12, 3.0098691067904313e-12, 6.3572178872963282e-12, 1.6161527990428490e-11, 6.0614339680175439e-11], [-1.0221427743842622e-17, -9.4836270253483156e-17, -2.8016716196707384e-16, -6.0336195832685897e-16, -1.1348833266413562e-15, -2.0045621266122777e-15, -3.4571750316847569e-15, -5.9774076571429397e-15, -1.0593946641882243e-14, -1.9701121293663764e-14, -3.9610594183369871e-14, -9.0178909901526478e-14, -2.5378999422788899e-13, -1.1115200469501961e-12], [1.0425830043431703e-19, 9.7078688993737033e-19, 2.8887024531886831e-18, 6.2901251802768455e-18, 1.2011766732887531e-17, 2.1637318863851206e-17, 3.8250618740429352e-17, 6.8190871813279944e-17, 1.2550190251966607e-16, 2.4452676003985806e-16, 5.2118750568199964e-16, 1.2790586080840906e-15, 3.9850842552284159e-15, 2.0382025592175133e-14], [-1.0576480614329418e-21, -9.8846642994058911e-21, -2.9633867900942867e-20, -6.5268042098168217e-20, -1.2659688445913229e-19, -2.3269056728692232e-19, -4.2188759976470194e-19, -7.7595580786043190e-19, -1.4838507059896463e-18, -3.0306870679620300e-18, -6.8510826776407891e-18, -1.8131138203862167e-17, -6.2556787133651915e-17, -3.7370848622466713e-16], [1.0384875894747486e-23, 9.7505398439356443e-23, 2.9503606153987865e-22, 6.5893053748939616e-22, 1.3022320262516170e-21, 2.4509050797914121e-21, 4.5743696670824370e-21, 8.7119744574368745e-21, 1.7369796628982095e-20, 3.7303204309993867e-20, 8.9663458120620161e-20, 2.5638601436867273e-19, 9.8090326344238741e-19, 6.8496939458979007e-18], [-8.3556530506148213e-26, -7.9392021533284019e-25, -2.4583374448282004e-24, -5.6741620359894715e-24, -1.1684563411054916e-23, -2.3065351982991287e-23, -4.5385696796385325e-23, -9.1521859398095990e-23, -1.9401524934507529e-22, -4.4526965252419765e-22, -1.1523079327288119e-21, -3.5916412738271180e-21, -1.5321618127212441e-20, -1.2542138537088398e-19], [-2.4454137796152970e-28, -1.8870574146022826e-27, -3.2916418648506428e-27, 4.6014538337579198e-28, 2.0513060028103307e-26, 8.2081822396359015e-26, 2.4439000999278971e-25, 6.5517146432184910e-25, 1.7151826262874254e-24, 4.6433304022171621e-24, 1.3785865417712287e-23, 4.8678226580532002e-23, 2.3645163553767931e-22, 2.2903367131448800e-21], [5.0686624276383273e-29, 4.5975799632412094e-28, 1.2941967490244646e-27, 2.5807373212277217e-27, 4.3319451402099126e-27, 6.4840422104641065e-27, 8.7024317703606233e-27, 9.7784098714783255e-27, 5.6368619454642556e-27, -1.8153492539775987e-26, -1.1952572508195701e-25, -5.8773270343703257e-25, -3.5223907230287282e-24, -4.1537121611725779e-23]],
        [[4.2469365938197247e-4, 3.8431079188377122e-3, 1.0793465931406620e-2, 2.1514102056414572e-2, 3.6393063415447791e-2, 5.6012242652071351e-2, 8.1221850241349452e-2, 1.1326711592235165e-1, 1.5401235725092669e-1, 2.0636308532905727e-1, 2.7513695111854280e-1, 3.6911427846680113e-1, 5.0697111161342079e-1, 7.4251212634509144e-1], [-8.3316641077579579e-6, -7.5651926867890936e-5, -2.1394144214492744e-4, -4.3096216526308913e-4, -7.3963018949017323e-4, -1.1599075000916027e-3, -1.7221024703508809e-3, -2.4727161226860211e-3, -3.4852714592412570e-3, -4.8817984650204062e-3, -6.8797738665351255e-3, -9.9098351307126640e-3, -1.4981282083376961e-2, -2.5370435020064607e-2], [8.1725527647330812e-8, 7.4460751032284183e-7, 2.1203078305382103e-6, 4.3164336442449553e-6, 7.5158940448071825e-6, 1.2009744165176579e-5, 1.8256398429173814e-5, 2.6990733247964740e-5, 3.9435527645796657e-5, 5.7742779466912933e-5, 8.6014052749300824e-5, 1.3302768010436577e-4, 2.2135266459494609e-4, 4.3343330718439388e-4], [-8.0164799967077142e-10, -7.3288330794607659e-9, -2.1013718749182038e-8, -4.3232564011075276e-8, -7.6374198982537311e-8, -1.2434953203898543e-7, -1.9354021563130951e-7, -2.9461517003599085e-7, -4.4620938661883375e-7, -6.8299185291443527e-7, -1.0753866930760071e-6, -1.7857374450748966e-6, -3.2705479967681379e-6, -7.4048565416054309e-6], [7.8633877144978884e-12, 7.2134370283440036e-11, 2.0826050148547120e-10, 4.3300899079641847e-10, 7.7609106653584338e-10, 1.2875216816097502e-9, 2.0517636567641132e-9, 3.2158480851580597e-9, 5.0488183459401908e-9, 8.0785489159645511e-9, 1.3444972033202599e-8, 2.3971388555351999e-8, 4.8323268114902368e-8, 1.2650596836395894e-7], [-7.7132182188121634e-14, -7.0998571727646213e-13, -2.0640055374141673e-12, -4.3369337683298796e-12, -7.8863973956078276e-12, -1.3331066857652950e-11, -2.1751209284687665e-11, -3.5102327132536292e-11, -5.7126913088416467e-11, -9.5554505031099815e-11, -1.6809512743432065e-10, -3.2178719533104895e-10, -7.1398987754587399e-10, -2.1612518206540880e-9], [7.5659074195714486e-16, 6.9880573734132348e-15, 2.0455697972273312e-14, 4.3437836119342082e-14, 8.0139047028632611e-14, 1.3803042887954542e-13, 2.3058926997709648e-13, 3.8315628039617955e-13, 6.4638529669543421e-13, 1.1302349247790362e-12, 2.1016004026084286e-12, 4.3196063536539389e-12, 1.0549398671395529e-11, 3.6923228524140799e-11], [-7.4213262186284164e-18, -6.8779416683966229e-17, -2.0272769573369247e-16, -4.3505999114019204e-16, -8.1433961858917826e-16, -1.4291604995349597e-15, -2.4445078026887588e-15, -4.1822797604916580e-15, -7.3137437731875958e-15, -1.3368550293300855e-14, -2.6275056681851999e-14, -5.7985382040346193e-14, -1.5587005511193866e-13, -6.3080283105770660e-13], [7.2788417219824948e-20, 6.7689539213228539e-19, 2.0089746519635503e-18, 4.3570741573436395e-18, 8.2743647120751600e-18, 1.4796474299723787e-17, 2.5913052532541713e-17, 4.5648760754019767e-17, 8.2750537875237102e-17, 1.5811994306491064e-16, 3.2849411571790432e-16, 7.7837081671567028e-16, 2.3030006009980696e-15, 1.0776706075256206e-14], [-7.1344400199241164e-22, -6.6574519273857048e-21, -1.9896286689226350e-20, -4.3610932437092335e-20, -8.4031387364631296e-20, -1.5312287196491909e-19, -2.7458667983617193e-19, -4.9809109098846173e-19, -9.3604224204305570e-19, -1.8698654501158839e-18, -4.1063660355346278e-18, -1.0447716249391554e-17, -3.4025781111932828e-17, -1.8410770015298137e-16], [6.9640324930834052e-24, 6.5214677580468563e-23, 1.9629660255654892e-22, 4.3498150237309319e-22, 8.5072092996748510e-22, 1.5803267518189342e-21, 2.9031119710027772e-21, 5.4251490399791270e-21, 1.0573861308144953e-20, 2.2091202367221352e-20, 5.1300141401293587e-20, 1.4018494890041239e-19, 5.0263020501491894e-19, 3.1450957445393613e-18], [-6.6370939482199297e-26, -6.2418487766185038e-25, -1.8949156736398445e-24, -4.2534170094103574e-24, -8.4639000386652311e-24, -1.6071569098470596e-23, -3.0329485782770723e-23, -5.8548497163229428e-23, -1.1864863966351231e-22, -2.5981339851228053e-22, -6.3910392917631177e-22, -1.8781639015626269e-21, -7.4200781405206991e-21, -5.3717543898495660e-20], [5.5173028557920483e-28, 5.2370098349805902e-27, 1.6189721923841431e-26, 3.7303443184063022e-26, 7.6721794281419819e-26, 1.5143889578744674e-25, 2.9852220878113070e-25, 6.0457848998478218e-25, 1.2911607614835140e-24, 2.9961611092895917e-24, 7.8721065328505546e-24, 2.5021179671165588e-23, 1.0929510137272723e-22, 9.1697923054721733e-22], [-8.8966958116722369e-31, -9.8686851413195551e-30, -4.1362372017057070e-29, -1.2926753744215384e-28, -3.5111353683274499e-28, -8.7595960123853888e-28, -2.0986235703217124e-27, -4.9975465289901414e-27, -1.2217877700063031e-26, -3.1837919009852394e-26, -9.2852760154624163e-26, -3.2679577248515698e-25, -1.5983564959175497e-24, -1.5625313921566728e-23]],
        [[4.0865510908182871e-4, 3.6974956033283033e-3, 1.0381785009941022e-2, 2.0685145369626153e-2, 3.4971169481968558e-2, 5.3784014866977089e-2, 7.7916715267634731e-2, 1.0852699836758551e-1, 1.4734125797949403e-1, 1.9703693794918818e-1, 2.6202707462180787e-1, 3.5029527319170221e-1, 4.7866370272433354e-1, 6.9497964218041277e-1], [-7.7143113127158211e-6, -7.0028253281154358e-5, -1.9793396421073527e-4, -3.9839432434271941e-4, -6.8296924671919606e-4, -1.0694672760910383e-3, -1.5848143509130938e-3, -2.2701073699268238e-3, -3.1899136918894689e-3, -4.4505787330855350e-3, -6.2398618339999420e-3, -8.9252639397279358e-3, -1.3355305836697162e-2, -2.2226991557897393e-2], [7.2812743199409014e-8, 6.6314565096272578e-7, 1.8868553986911470e-6, 3.8365221716378760e-6, 6.6690219239589484e-6, 1.0632901406269640e-5, 1.6117443594927149e-5, 2.3742421464257949e-5, 3.4530550034750935e-5, 5.0263801461608426e-5, 7.4297428545401305e-5, 1.1370455511412078e-4, 1.8631472678654332e-4, 3.5543426291170206e-4], [-6.8725455288439803e-10, -6.2797818561795852e-9, -1.7986924627306835e-8, -3.6945562407875918e-8, -6.5121312027357810e-8, -1.0571486836399698e-7, -1.6391319770499155e-7, -2.4831538121748936e-7, -3.7379032815098724e-7, -5.6766768746581456e-7, -8.8465226236603417e-7, -1.4485538960704439e-6, -2.5992049782415637e-6, -5.6837883309466324e-6], [6.4867604131495586e-12, 5.9467569573791073e-11, 1.7146489210048766e-10, 3.5578435878384066e-10, 6.3589313785204554e-10, 1.0510426984849006e-9, 1.6669849786538261e-9, 2.5970614922230841e-9, 4.0462491680644299e-9, 6.4111068776571784e-9, 1.0533468523922698e-8, 1.8454039831271593e-8, 3.6260507333032161e-8, 9.0890083355865806e-8], [-6.1226309962050067e-14, -5.6313927464121365e-13, -1.6345322824447402e-12, -3.4261897946064467e-12, -6.2093355750183391e-12, -1.0449719727912319e-11, -1.6953112609677479e-11, -2.7161943477927049e-11, -4.3800309954949976e-11, -7.2405550086791218e-11, -1.2542098557519518e-10, -2.3509762787558231e-10, -5.0585636733818084e-10, -1.4534333010671793e-9], [5.7789410979757552e-16, 5.3327521495990764e-15, 1.5581589195190673e-14, 3.2994073711546793e-14, 6.0632584962290948e-14, 1.0389362212705824e-13, 1.7241187419700995e-13, 2.8407918850622999e-13, 4.7413467476293403e-13, 8.1773140087223218e-13, 1.4933754171513250e-12, 2.9950565472148704e-12, 7.0570071214866054e-12, 2.3242011162894196e-11], [-5.4545382320955128e-18, -5.0499436172525160e-17, -1.4853525964100351e-16, -3.1773133440440974e-16, -5.9206126309407481e-16, -1.0329344844660641e-15, -1.7534144444979265e-15, -2.9711030701250471e-15, -5.1324652355148767e-15, -9.2352637196976369e-15, -1.7781469093536894e-14, -3.8155899782809694e-14, -9.8449569682339735e-14, -3.7166551687007991e-13], [5.1482985301955287e-20, 4.7820899962497671e-19, 1.4159359398148791e-18, 3.0597124050839782e-18, 5.7812791962754107e-18, 1.0269604691632268e-17, 1.7831973680501837e-17, 3.1073762018749643e-17, 5.5558246746577806e-17, 1.0430053542323152e-16, 2.1172164545954182e-16, 4.8609111817582655e-16, 1.3734304900735626e-15, 5.9433410185353107e-15], [-4.8589111686431690e-22, -4.5281327037426930e-21, -1.3496748797349152e-20, -2.9462839429118492e-20, -5.6449108622316926e-20, -1.0209708303825868e-19, -1.8134098774708432e-19, -3.2497868130188602e-19, -6.0139406105382321e-19, -1.1779174669128805e-18, -2.5209061200834932e-18, -6.1925533587345126e-18, -1.9160085252317694e-17, -9.5040386778013586e-17], [4.5835986750300366e-24, 4.2856649096455845e-23, 1.2859457955917557e-22, 2.8359020738239641e-22, 5.5097411997210324e-22, 1.0146934659934708e-21, 1.8436433864408677e-21, 3.3979975783064851e-21, 6.5087684460868627e-21, 1.3301244728831414e-20, 3.0013345134472780e-20, 7.8886365101141850e-20, 2.6728733272232452e-19, 1.5197856220277532e-18], [-4.3112265801551490e-26, -4.0446474219471435e-25, -1.2219411611919629e-24, -2.7229655616066192e-24, -5.3661496192165038e-24, -1.0065898564514167e-23, -1.8715424307669201e-23, -3.5487640222370506e-23, -7.0381553863451696e-23, -1.5010953511279439e-22, -3.5719703446780546e-22, -1.0047159971587101e-21, -3.7283636879170180e-21, -2.4302108943581458e-20], [3.9891753922150912e-28, 3.7572212320512384e-27, 1.1440307366547995e-26, 2.5797118020509344e-26, 5.1655598150003379e-26, 9.8883629948642556e-26, 1.8850608921719795e-25, 3.6842779406378085e-25, 7.5784492292719219e-25, 1.6893124963727775e-24, 4.2440146467150375e-24, 1.2785263877643773e-23, 5.1987970943699619e-23, 3.8856533353672712e-22], [-3.3406630549642597e-30, -3.2170733791044388e-29, -9.9745122404351417e-29, -2.2961487062683022e-28, -4.7125987005828087e-28, -9.2975709761423609e-28, -1.8343833406764314e-27, -3.7299034015074912e-27, -8.0186020599490376e-27, -1.8802781411980395e-26, -5.0103486145377281e-26, -1.6217301064560032e-25, -7.2392604519657428e-25, -6.2094358977465613e-24]],
    ],
]

POLYFIT_W = [
    [
        [[2.3409590901181555e-1, 1.9653014490179434e-1, 1.4222161878494479e-1, 9.1641487589105279e-2, 5.1948190701386564e-2, 2.0802615099695841e-2], [-1.4517004887667181e-2, -3.4140717585554516e-2, -5.3516564953697523e-2, -5.6704939082693197e-2, -4.3169564333434682e-2, -1.9975343894954719e-2], [5.1473674252425459e-4, 2.6380914837906192e-3, 6.7155213904716011e-3, 1.0228300804945781e-2, 9.9762512381335022e-3, 5.2838332212332552e-3], [-1.8703650778518503e-5, -1.7292780276227390e-4, -6.5582656438705352e-4, -1.3475479828590947e-3, -1.6183267920838084e-3, -9.6293075183016715e-4], [6.6753612370917755e-7, 1.0089225598807965e-5, 5.3780766837901251e-5, 1.4233019598557996e-4, 2.0388159441624472e-4, 1.3397009123680793e-4], [-2.3175944179864640e-8, -5.3766847383974143e-7, -3.8521344156294682e-6, -1.2670420320451882e-5, -2.1099568341917455e-5, -1.5088809021617942e-5], [7.8199008222585699e-10, 2.6582124424858939e-8, 2.4691829878575722e-7, 9.8065053841678528e-7, 1.8585913682259626e-6, 1.4287634662204959e-6], [-2.5707779167337289e-11, -1.2319937351233708e-9, -1.4397082833091550e-8, -6.7392857914965944e-8, -1.4280049514728916e-7, -1.1678130215372803e-7], [8.2480996838329834e-13, 5.3927937746479820e-11, 7.7256740149319748e-10, 4.1752744214956731e-9, 9.7422144971989964e-9, 8.4008278857431048e-9], [-2.5895125240014934e-14, -2.2419138960805492e-12, -3.8488403845603315e-11, -2.3588603756907329e-10, -5.9822668244600587e-10, -5.3984113812483782e-10], [7.9583616476964095e-16, 8.8895620126796847e-14, 1.7922097285025447e-12, 1.2261689924281458e-11, 3.3419121649997938e-11, 3.1355329647854933e-11], [-2.4011616444304910e-17, -3.3732772493538477e-15, -7.8423466869640722e-14, -5.9067473979232039e-13, -1.7131460647248701e-12, -1.6618650769838985e-12], [7.1129484286968476e-19, 1.2282973943421448e-16, 3.2389094339175853e-15, 2.6525115432546479e-14, 8.1162665987116874e-14, 8.1009916728462937e-14], [-2.0570536228948305e-20, -4.2964119871357215e-18, -1.2654687630392909e-16, -1.1142469430517559e-15, -3.5693653666636553e-15, -3.6500495330280912e-15]],
        [[2.0857754156850001e-1, 1.4429380592034240e-1, 7.1455089572297138e-2, 2.7272261529815896e-2, 8.8671605787798170e-3, 2.3626984997972788e-3], [-1.1144948577120208e-2, -1.9230994089431731e-2, -2.0928439546239101e-2, -1.4149327477041014e-2, -6.7549025820220897e-3, -2.2151846066375894e-3], [3.4182348829132595e-4, 1.2636571085532976e-3, 2.2276253480703046e-3, 2.2348995519063620e-3, 1.4489341396076768e-3, 5.7256030724030947e-4], [-1.0911805581364847e-5, -7.1844947373182684e-5, -1.8908756019607384e-4, -2.6376856452452817e-4, -2.2081963627944858e-4, -1.0224709722485455e-4], [3.4581075972088201e-7, 3.6834936389815053e-6, 1.3731066729185655e-5, 2.5376506897216663e-5, 2.6390948257025000e-5, 1.3976739538315647e-5], [-1.0747157237350827e-8, -1.7433746078871090e-7, -8.8315755068953971e-7, -2.0840425013003435e-6, -2.6110594062661145e-6, -1.5501711812692060e-6], [3.2578072842926981e-10, 7.7229983144034237e-9, 5.1405529825985193e-8, 1.5032868653751699e-7, 2.2126516320274277e-7, 1.4482165130433872e-7], [-9.6762677531153892e-12, -3.2313502641561458e-10, -2.7473285951395396e-9, -9.7098817889521417e-9, -1.6439129948515336e-8, -1.1697179605962200e-8], [2.8053449608071747e-13, 1.2854755833275026e-11, 1.3622266991605044e-10, 5.6943734743164291e-10, 1.0891444968043821e-9, 8.3260866376750350e-10], [-8.0002284680187223e-15, -4.8856132011063684e-13, -6.3151741753458809e-12, -3.0638610450371088e-11, -6.5183114627695698e-11, -5.3000902086440721e-11], [2.2492232100106706e-16, 1.7807721049188469e-14, 2.7536937519132677e-13, 1.5248036874726198e-12, 3.5598473923437078e-12, 3.0524067614308227e-12], [-6.0983341523293187e-18, -6.2438592870271220e-16, -1.1347572284674329e-14, -7.0649624042610877e-14, -1.7886699225728580e-13, -1.6054502799388195e-13], [1.6726205470484208e-19, 2.1104401232954940e-17, 4.4361794994793184e-16, 3.0639070870184455e-15, 8.3246334962091899e-15, 7.7717188460682002e-15], [-4.5474317265944008e-21, -6.8846311745941748e-19, -1.6485090084512029e-17, -1.2475085527486825e-16, -3.6035650506119042e-16, -3.4796111929633024e-16]],
        [[1.8866470839354973e-1, 1.1377707990686102e-1, 4.2197489214577648e-2, 1.0204860335351816e-2, 1.8435793611857321e-3, 2.8972581829938792e-4], [-8.8540359138573686e-3, -1.1780424046286765e-2, -9.4570325975813345e-3, -4.2665753883894455e-3, -1.2414052490420993e-3, -2.6205331904016047e-4], [2.3814848724657796e-4, 6.6592662747775144e-4, 8.5621977518353335e-4, 5.8000221616241237e-4, 2.4129159880173293e-4, 6.5531250480874837e-5], [-6.7503148642827891e-6, -3.3140811464535445e-5, -6.3053605956219337e-5, -6.0414663779085394e-5, -3.3910436446144912e-5, -1.1377334738531595e-5], [1.9141323854805864e-7, 1.5030647682569791e-6, 4.0437194466509427e-6, 5.2269111151863534e-6, 3.7871499375430789e-6, 1.5184261801167879e-6], [-5.3800833997296757e-9, -6.3475798001464127e-8, -2.3272248477304064e-7, -3.9145339641790402e-7, -3.5374452371132960e-7, -1.6499170296203741e-7], [1.4713771645554171e-10, 2.5285438309221509e-9, 1.2250470546731694e-8, 2.6039316801007441e-8, 2.8533439308921605e-8, 1.5143445519152947e-8], [-3.9827646852052622e-12, -9.5725475210792595e-11, -5.9733557014101511e-10, -1.5653958410493471e-9, -2.0313397343526400e-9, -1.2044068671152353e-9], [1.0633493834877025e-13, 3.4653380921732066e-12, 2.7229790605127851e-11, 8.6114129952031733e-11, 1.2967290528867698e-10, 8.4577008940902075e-11], [-2.6590015907559692e-15, -1.2052643977506002e-13, -1.1685249035585038e-12, -4.3756674100116686e-12, -7.5122418996099209e-12, -5.3198054872764540e-12], [7.2246140002412015e-17, 4.0348887291178784e-15, 4.7448156058306039e-14, 2.0686510926856413e-13, 3.9869379950376549e-13, 3.0313009033979519e-13], [-1.8321297130920752e-18, -1.3060557244478957e-16, -1.8309108361526359e-15, -9.1522647127715995e-15, -1.9532850265882528e-14, -1.5792226714187518e-14], [3.9015043029958541e-20, 4.0958868464196553e-18, 6.7367666462540796e-17, 3.8074295932850104e-16, 8.8894885651627940e-16, 7.5794611340731625e-16], [-1.1211556610775911e-21, -1.2422721646789895e-19, -2.3672731308498438e-18, -1.4933050707417211e-17, -3.7724287948861518e-17, -3.3673861931361521e-17]],
        [[1.7263735808269681e-1, 9.4520470638944877e-2, 2.8331965083379528e-2, 4.7316875563024416e-3, 4.8429307238549760e-4, 3.9664392676337710e-5], [-7.2278934626961704e-3, -7.7137565816744925e-3, -4.8063521144849432e-3, -1.5354838455459265e-3, -2.7490418444171754e-4, -3.3908852772076313e-5], [1.7250195834682442e-4, 3.7927682330892432e-4, 3.7377419726852636e-4, 1.7803586575575003e-4, 4.7159339239583514e-5, 8.0787409110582223e-6], [-4.3886114610535540e-6, -1.6678805032713292e-5, -2.3924641598745711e-5, -1.6187915790560074e-5, -5.9865660644091096e-6, -1.3477052250688958e-6], [1.1176510455603695e-7, 6.7435583755556764e-7, 1.3561666235808362e-6, 1.2474806639279826e-6, 6.1438176397691994e-7, 1.7400250980424841e-7], [-2.8743864614941177e-9, -2.5545111135360297e-8, -6.9788005125960430e-8, -8.4416045554382403e-8, -5.3417768919664930e-8, -1.8387858957796501e-8], [7.2063206370520982e-11, 9.1909972062471604e-10, 3.3173521854578314e-9, 5.1327472893808841e-9, 4.0517463975130734e-9, 1.6482158412349789e-9], [-1.6853823133283251e-12, -3.1639019112676025e-11, -1.4730870129239256e-10, -2.8476973757753843e-10, -2.7349809228086937e-10, -1.2844954719073299e-10], [4.7035105665795934e-14, 1.0420018716241769e-12, 6.1529118874615871e-12, 1.4574573464141575e-11, 1.6667724537012383e-11, 8.8625084531680521e-12], [-9.8361801408229345e-16, -3.3297701824929620e-14, -2.4365759980535593e-13, -6.9392364234683121e-13, -9.2714948929623445e-13, -5.4892023768116178e-13], [1.8726754767152042e-17, 1.0280373345190929e-15, 9.1813876030668003e-15, 3.0931715176137415e-14, 4.7478052036584864e-14, 3.0856837005941623e-14], [-8.0169693299988006e-19, -3.0515960790744426e-17, -3.3020559231747450e-16, -1.2974318111321507e-15, -2.2537562781919905e-15, -1.5883430474402098e-15], [1.2741094537817186e-20, 8.9046791365931853e-19, 1.1386897202970975e-17, 5.1426685062748461e-17, 9.9740101202085636e-17, 7.5419486445761707e-17], [-8.3043400001695981e-23, -2.5270303946318152e-20, -3.7672125909942861e-19, -1.9305488228362275e-18, -4.1290129287479959e-18, -3.3187569869394119e-18]],
        [[1.5941374093330997e-1, 8.1601389488656578e-2, 2.1005024420559800e-2, 2.6457912942657467e-3, 1.6444389227730234e-4, 6.3743332521766117e-6], [-6.0319581504923817e-3, -5.3290038473132079e-3, -2.6792711576621628e-3, -6.4415804346399177e-4, -7.4326137567029346e-5, -4.9698853152178831e-6], [1.2893806132508724e-4, 2.3020585062673419e-4, 1.8176960873645748e-4, 6.3870600668294926e-5, 1.0996659902350698e-5, 1.1020871969322724e-6], [-2.9796666385996913e-6, -9.0230740829563891e-6, -1.0151837241293254e-5, -5.0339048850512436e-6, -1.2353214087818938e-6, -1.7362927395387833e-7], [6.8504136714911375e-8, 3.2791104700186627e-7, 5.1045457187074439e-7, 3.4364064626280321e-7, 1.1458069492903376e-7, 2.1402137202062002e-8], [-1.5701418613323622e-9, -1.1226886241291184e-8, -2.3549120067696149e-8, -2.0888655903970551e-8, -9.1404059594525199e-9, -2.1768379510534287e-9], [4.1304200883896075e-11, 3.6420620115506070e-10, 1.0087101950555956e-9, 1.1530556031003698e-9, 6.4368055028576903e-10, 1.8897551013073755e-10], [-6.6059758218588544e-13, -1.1566973918391554e-11, -4.0919802912174030e-11, -5.8682976974872661e-11, -4.0734621664090878e-11, -1.4333100893579055e-11], [1.8235850606555782e-14, 3.4722246970096905e-13, 1.5638529449376585e-12, 2.7757908391408700e-12, 2.3461313260704851e-12, 9.6620888868967558e-13], [-7.5913764724779675e-16, -9.9990659209539632e-15, -5.6855734918571049e-14, -1.2299400518849538e-13, -1.2417947396665712e-13, -5.8654246782647557e-14], [-2.6704939756858197e-18, 2.9519150941647884e-16, 1.9933364558008731e-15, 5.1369217708467498e-15, 6.0862521771865726e-15, 3.2399605444491858e-15], [-1.2429723017609134e-19, -8.0346369871702386e-18, -6.6587427871703572e-17, -2.0294750425681623e-16, -2.7790386164932315e-16, -1.6423302159713149e-16], [1.8491072784731349e-20, 2.0734034652667720e-19, 2.1379957371496869e-18, 7.6157381107877259e-18, 1.1881742002171717e-17, 7.6931677764020328e-18], [2.7934602789192578e-22, -5.8423614157804107e-21, -6.6682023135149827e-20, -2.7201602098339183e-19, -4.7704368050705550e-19, -3.3448137187411217e-19]],
        [[1.4827988486482663e-1, 7.2495518639581444e-2, 1.6793688343315053e-2, 1.7270121381878675e-3, 7.2209050192623065e-5, 1.2899706367506357e-6], [-5.1269087706069846e-3, -3.8457197414415667e-3, -1.6023987694313747e-3, -3.0551986441941174e-4, -2.4371573880783073e-5, -8.6191088247327516e-7], [9.8881585940931699e-5, 1.4728267631143189e-4, 9.6806329314948370e-5, 2.6353916370297574e-5, 3.0773613417890229e-6, 1.7222074407231833e-7], [-2.0863956271114791e-6, -5.1889800081104448e-6, -4.7446411020035176e-6, -1.7935901106126905e-6, -3.0041282039003139e-7, -2.5010331473632437e-8], [4.5747100527035035e-8, 1.6987588777194514e-7, 2.1158354629371588e-7, 1.0807141636222681e-7, 2.4822922221621899e-8, 2.8901859989503318e-9], [-7.6079239025491022e-10, -5.3824517807593904e-9, -8.8899134261511493e-9, -5.9067884661504944e-9, -1.7944329791447711e-9, -2.7893258301358113e-10], [2.6746643160357065e-11, 1.5471522735929706e-10, 3.3949175879023582e-10, 2.9402112107466373e-10, 1.1588907845739243e-10, 2.3185446640742540e-11], [-5.2764280533697485e-13, -4.4892000257275292e-12, -1.2563062701252987e-11, -1.3669534428369231e-11, -6.8009649346297782e-12, -1.6956779685462090e-12], [-9.5326082180176356e-15, 1.3485811613632450e-13, 4.5085390976832118e-13, 5.9664959079896714e-13, 3.6650881838244820e-13, 1.1083365213905692e-13], [-6.5709018571564739e-16, -3.1705129831409631e-15, -1.4657487841942606e-14, -2.4411607022775616e-14, -1.8284386701844602e-14, -6.5527905421078485e-15], [1.6858675729584937e-17, 8.2403257607239845e-17, 4.7425207249728360e-16, 9.5059349488143894e-16, 8.5043040699262615e-16, 3.5380406903181376e-16], [1.0942085848958793e-18, -2.8845265639158054e-18, -1.5429164961871031e-17, -3.5286504170456761e-17, -3.7061136218146651e-17, -1.7581971532547157e-17], [2.5618942490492821e-20, 4.7085704208948834e-20, 4.3691921080288216e-19, 1.2424013043406359e-18, 1.5196704605573031e-18, 8.0940583927948654e-19], [-6.3058412850992392e-22, -1.0168712726886190e-21, -1.2815539467371859e-20, -4.2054194410506922e-20, -5.8793211996275254e-20, -3.4657772447924614e-20]],
        [[1.3874598366962515e-1, 6.5813097270729187e-2, 1.4216271074209889e-2, 1.2747298982713632e-3, 4.0104580457124568e-5, 3.5688504547682191e-7], [-4.4245179022242866e-3, -2.8773743865363090e-3, -1.0092697127258629e-3, -1.5839084826345797e-4, -9.4123958726645689e-6, -1.8433154847604995e-7], [7.7831716895759155e-5, 9.8325866045797517e-5, 5.5481686687926836e-5, 1.2268592005362247e-5, 1.0277866630797646e-6, 3.2044829078784542e-8], [-1.4471482683448923e-6, -3.1655448518048259e-6, -2.4344438318478111e-6, -7.2576102372898962e-7, -8.6120819749866827e-8, -4.1585009020085312e-9], [3.5508155772050947e-8, 9.1314684711056137e-8, 9.3514371690635672e-8, 3.7962085809802894e-8, 6.2469216990797701e-9, 4.4016767978211199e-10], [-3.4522848292528320e-10, -2.7782053039137182e-9, -3.7168922269620871e-9, -1.8949928734123751e-9, -4.0682131149651779e-10, -3.9588265559180408e-11], [5.6868875952790870e-12, 7.5551252090384204e-11, 1.3027483673082635e-10, 8.5252849748748345e-11, 2.3853488184415106e-11, 3.1041485385877359e-12], [-9.7476410233304927e-13, -1.5758371258265619e-12, -3.9516031431046625e-12, -3.5351259318144155e-12, -1.2831376695513036e-12, -2.1626330525253051e-13], [-8.0137567223038883e-15, 5.4977464855280531e-14, 1.4406134337204703e-13, 1.4449777475566370e-13, 6.4247898451096531e-14, 1.3570147913563705e-14], [1.0615522035695625e-15, -1.8011436610370787e-15, -4.7923354882239007e-15, -5.5095930193698488e-15, -2.9946993516543857e-15, -7.7485105397496184e-16], [6.0173326759798429e-17, 2.8086952520257680e-18, 1.0140769605097064e-16, 1.9210124458333993e-16, 1.3082209504155667e-16, 4.0606912278140198e-17], [-2.9011098353448013e-19, -4.8120797709701478e-19, -3.6429118674401840e-18, -6.8236747431562539e-18, -5.4095959795656740e-18, -1.9667174847071430e-18], [-1.1490644831891879e-19, 7.3948295973541219e-20, 1.5454672273143751e-19, 2.3241595188773157e-19, 2.1122220865711584e-19, 8.8531123854455742e-20], [-3.5449136871600587e-21, 1.0757473878005253e-21, -1.1046152768523981e-21, -6.8236326167661868e-21, -7.7949556749353689e-21, -3.7173263747843700e-21]],
        [[1.3047108378984467e-1, 6.0739778211980610e-2, 1.2563906907844383e-2, 1.0342797228124764e-3, 2.7119593160000485e-5, 1.4335049656221103e-7], [-3.8621917979821716e-3, -2.2215214181506486e-3, -6.6153468953163832e-4, -8.7046812167236850e-5, -4.0882444257186503e-6, -4.9249856098916455e-8], [6.3645563143915836e-5, 6.7557009668451920e-5, 3.3258654737481568e-5, 6.2396536593788617e-6, 4.0077177629821921e-7, 7.3343602623827419e-9], [-9.3604289756481491e-7, -2.0626890258866884e-6, -1.3930983938454918e-6, -3.3657202753725806e-7, -2.9187030267344887e-8, -8.2411044513719851e-10], [2.7810283175994823e-8, 5.1085105849872937e-8, 4.3579627150051291e-8, 1.4583055560657619e-8, 1.8052185286012078e-9, 7.7605176443605963e-11], [-5.1600036574342275e-10, -1.3546104140329057e-9, -1.5340071323300978e-9, -6.5600340537552009e-10, -1.0557859877812597e-10, -6.3804405245843841e-12], [-1.6835914364769942e-11, 4.6546435171081789e-11, 6.2603235986498754e-11, 2.9143957309769060e-11, 5.6827894227087624e-12, 4.6410616930500884e-13], [-2.9300745803604982e-13, -8.0861464362806315e-13, -1.5111542126902276e-12, -1.0334408637344934e-12, -2.7456630937406988e-13, -3.0311817641987874e-14], [5.3271582839528126e-14, -3.1629043839727179e-15, 2.4057465568377087e-14, 3.4847626592782972e-14, 1.2560029381564900e-14, 1.8037062482429726e-15], [1.3512948109177984e-15, -1.0720539492286308e-15, -2.0178437880112245e-15, -1.4797314003451181e-15, -5.5554645127961232e-16, -9.8512040428221220e-17], [-8.3417481322591656e-17, 5.2737032205058545e-17, 7.4606400483529208e-17, 5.0336099764697554e-17, 2.2538718730307096e-17, 4.9624178466465956e-18], [-4.7185403938176917e-18, 1.8106697346650865e-18, 1.2107959380833838e-18, -1.0413632495791478e-18, -8.5119362898590313e-19, -2.3236417028959860e-19], [8.1892196991051066e-20, -4.4291040995302691e-20, -4.9568125254935579e-21, 4.4022023224636080e-20, 3.2445050977565300e-20, 1.0175531620560352e-20], [1.1908312013857448e-20, -5.5014307250848687e-21, -6.1982284826542699e-21, -2.3072589945476523e-21, -1.1680286111050887e-21, -4.1651068293341403e-22]],
        [[1.2322502837052633e-1, 5.6767484228899675e-2, 1.1461092170227071e-2, 8.9958637299630520e-4, 2.1304978845166942e-5, 8.2536683635755609e-8], [-3.3913185574547766e-3, -1.7678840690329878e-3, -4.5234921963959118e-4, -5.0110116307838822e-5, -1.9146894223537237e-6, -1.5859394948808000e-8], [5.4672558353522719e-5, 4.6989287637424903e-5, 1.9940132325796968e-5, 3.2683521709369171e-6, 1.7256012287514913e-7, 2.0680783337317043e-9], [-5.9463064047573301e-7, -1.4095632113623251e-6, -8.7309326518026812e-7, -1.7827962091877861e-7, -1.1769736543761763e-8, -2.0093090272011455e-10], [1.3862219713777481e-8, 3.3181621659893575e-8, 2.4743043027274127e-8, 6.6008696708606317e-9, 6.0910273077859746e-10, 1.6194055765106835e-11], [-8.1149734162771394e-10, -5.3910911037196771e-10, -4.9696308984625280e-10, -2.1487094186429101e-10, -2.9701134312304266e-11, -1.1841910861453693e-12], [-1.0333066543669348e-13, 2.0149531822322304e-11, 2.4646976679298367e-11, 1.0176525215469712e-11, 1.5353802760791579e-12, 7.9378931637479311e-14], [1.2912375006120612e-12, -1.0374606513836612e-12, -1.2710415803477820e-12, -4.5022279714524267e-13, -7.1486157782156669e-14, -4.7955738676253746e-15], [1.6567074657934440e-14, 3.6050960794274332e-15, 9.7705684749883665e-15, 9.6681457596493126e-15, 2.7124346896960742e-15, 2.6405384967448781e-16], [-3.1717653650265558e-15, 1.2391137370812031e-15, 9.9004640846759255e-16, -1.2318015989914607e-16, -1.0343607033059123e-16, -1.3627149578946451e-17], [-4.6728367539473471e-17, 2.0628025242867908e-17, 3.6255738199768870e-17, 1.7495911932898566e-17, 4.6943832498295905e-18, 6.6084198202822255e-19], [7.1030726166091474e-18, -3.3509062167518594e-18, -3.5730126479452404e-18, -8.9644462728775162e-19, -1.7653283166227450e-19, -2.9536556702299172e-20], [1.3742727127608522e-19, -4.4187337910400779e-20, -6.4567885926078073e-20, -8.2243663436190137e-21, 4.1620498896400141e-21, 1.2260375659643720e-21], [-1.5800877353998292e-20, 7.2599320334800559e-21, 7.0820053788908504e-21, 9.2420204882702244e-22, -1.3666209963462613e-22, -4.9121281689187617e-23]],
        [[1.1685906067336535e-1, 5.3559976945057633e-2, 1.0687087311678240e-2, 8.1983320044674754e-4, 1.8502506425324816e-5, 6.1967483202234820e-8], [-2.9798835234399681e-3, -1.4512983732564190e-3, -3.2860900313997167e-4, -3.0984476572936389e-5, -9.6840127693560344e-7, -5.8548289972077703e-9], [4.8364951503287967e-5, 3.2964000019877685e-5, 1.1583927041962276e-5, 1.6536061638719762e-6, 7.5169674547763867e-8, 6.7206325477588283e-10], [-4.9079320458287357e-7, -9.4775457294166625e-7, -5.3558588903604075e-7, -9.7452341259576570e-8, -5.3121761092573797e-9, -6.0673155660630257e-11], [4.0101536711755134e-10, 2.5122540284481300e-8, 1.8169914596803928e-8, 3.8994051310353581e-9, 2.6120009452058338e-10, 4.2015780935667600e-12], [-4.2317019528906858e-10, -3.5118228519380777e-10, -2.6201376815961206e-10, -8.8126744879292705e-11, -9.5288433526129443e-12, -2.5454485597030302e-13], [2.7306174012466756e-11, -1.0591154240962298e-12, -1.0111564124647224e-12, 1.7556310107056622e-12, 3.7414730589245096e-13, 1.5158645904694737e-14], [2.3617646449647656e-13, -3.2024250264892426e-13, -4.1255139109687892e-13, -1.5174862731802136e-13, -2.0286865795165283e-14, -8.7791778727727066e-16], [-6.0438724944042658e-14, 3.1474558508297744e-14, 3.5602131129371262e-14, 8.9099796572038080e-15, 9.3485107663634608e-16, 4.5495946244618568e-17], [2.2054474032654451e-16, -2.4827541873256691e-16, -2.5161042024814670e-16, -1.0556591260036818e-16, -2.4012230419427495e-17, -2.0719862876095952e-18], [1.3716659212435834e-16, -5.7362575607925031e-17, -6.0869715417299819e-17, -9.0780893034887661e-18, 3.2985247249834972e-19, 9.0545972242877838e-20], [-2.4644710887346298e-18, 1.2134171691481230e-18, 9.7857355996132307e-19, 4.8351389894708366e-20, -2.9775464544429471e-20, -4.1185478997885167e-21], [-2.7772523332063544e-19, 1.1469153538184487e-19, 1.3689011592759568e-19, 2.9966324386903432e-20, 2.4952417464300517e-21, 1.7806111194192837e-22], [9.4716669930711653e-21, -4.4928222312906187e-21, -4.3457228559478735e-21, -7.3830847651507474e-22, -5.2206615622346090e-23, -6.2412594619631563e-24]],
        [[1.1126735983503627e-1, 5.0889538792662680e-2, 1.0105402390585015e-2, 7.6805655680964160e-4, 1.7007340293445440e-5, 5.3941696630386923e-8], [-2.6168283011428636e-3, -1.2267956163492783e-3, -2.5712121672399928e-4, -2.1496821471390096e-5, -5.6304144181658576e-7, -2.5382307288583239e-9], [4.2347494645784876e-5, 2.3762564087945560e-5, 6.7183364832815064e-6, 8.0507946931842194e-7, 3.1387758402215125e-8, 2.2612054834458257e-10], [-5.1775804821936152e-7, -6.0459734333489958e-7, -2.8996412807400121e-7, -4.7804055990980263e-8, -2.3116345730410292e-9, -2.0497956713104872e-11], [-1.9599127282674456e-9, 1.7625914616446775e-8, 1.2331292757191983e-8, 2.3579442390082569e-9, 1.2871062352053695e-10, 1.3846734945284059e-12], [1.2985800594850188e-10, -3.9067445940253505e-10, -3.1770186002769407e-10, -7.0316224324583100e-11, -4.7246267298006370e-12, -7.1707794757290799e-14], [1.3580021484555870e-11, 4.8610703097925377e-13, -4.4519432207928855e-13, 5.4318879155218851e-13, 1.0651316124195216e-13, 3.2483001913383949e-15], [-8.7057981003610928e-13, 2.6305872966608051e-13, 2.7030261660235072e-13, 2.4233191602658702e-14, -2.6138989159659930e-15, -1.5863070860617154e-16], [3.6068344878799749e-16, 1.7630544145492033e-15, 3.1742631730753892e-15, 1.5243918334188875e-15, 2.2104569391618299e-16, 8.6490361035874491e-18], [1.7833950702389767e-15, -8.1143154442406671e-16, -9.1771704984359803e-16, -1.9803568758429142e-16, -1.4444001632640281e-17, -4.2939197467392206e-19], [-5.2882741634121108e-17, 2.4680383062629513e-17, 2.6122408329809414e-17, 5.2616444413515131e-18, 3.9223204702185226e-19, 1.6517782474397824e-20], [-2.2067828740388413e-18, 8.6929381041378112e-19, 1.0475601388212529e-18, 2.0283046048509239e-19, 5.9654914455114795e-21, -4.9208662440127332e-22], [1.7596553808916572e-19, -7.5321400856284407e-20, -8.2925958267983759e-20, -1.5304934215898835e-20, -5.6765704178641687e-22, 1.6786522571729039e-23], [-5.4602691308040517e-22, 4.2190393049618876e-22, 1.4722893975601526e-22, -5.1682833587503255e-23, -1.3046615047134562e-23, -9.5949172447996327e-25]],
        [[1.0635261088740363e-1, 4.8606075973756449e-2, 9.6359425430914583e-3, 7.3007295748537305e-4, 1.6065012974356147e-5, 5.0103101651689800e-8], [-2.3031603035078740e-3, -1.0614993089758334e-3, -2.1441286860889602e-4, -1.6810394028123856e-5, -3.9425073404092422e-7, -1.4237436359599167e-9], [3.6068054394517161e-5, 1.7950206238590349e-5, 4.2178442767895551e-6, 4.1439667737441783e-7, 1.3291444953682277e-8, 7.6373350148555983e-11], [-5.1829946004683122e-7, -3.8210896448134127e-7, -1.4160695210821910e-7, -2.0357543575123603e-8, -8.8486542239637048e-10, -6.6733132549009059e-12], [2.1194810753740102e-9, 1.0471794730448027e-8, 6.4432069542694434e-9, 1.1435042170464926e-9, 5.6353893516550127e-11, 4.8514096527336646e-13], [2.0707953364581630e-10, -3.0362234551559303e-10, -2.4835127970983533e-10, -4.8551401408281438e-11, -2.6157446528677995e-12, -2.6359157460812797e-14], [-4.3432094478667604e-12, 5.7675634360865153e-12, 5.2299437502406540e-12, 1.1650567055042753e-12, 7.6380748442123502e-14, 1.0696946173144877e-15], [-3.0118058609429879e-13, 6.3207617007698574e-14, 7.3922535414376117e-14, 5.3928605136438737e-15, -7.9102355165740033e-16, -3.4609582230837269e-17], [2.1862325484245503e-14, -8.3477413546208871e-15, -8.8727897986410486e-15, -1.3682193433363673e-15, -2.2917292141665451e-17, 1.2153974288917908e-18], [-3.5652368848187581e-16, 1.3810168559528424e-16, 1.3639004599072053e-16, 1.6019150133316056e-17, -7.1837383565410578e-19, -6.5525540004962295e-20], [-2.5678465904401072e-17, 1.1190837784971151e-17, 1.2937616817330342e-17, 2.7469939673147520e-18, 1.7932171302389197e-19, 3.8172983906512279e-21], [1.6848348858146714e-18, -7.2857468269467773e-19, -8.1454562515826406e-19, -1.6111864734588368e-19, -9.0818445340787219e-21, -1.6487354129934625e-22], [-2.0232120022456960e-20, 9.4245629140004874e-21, 9.5465745931811446e-21, 1.7458770784332916e-21, 1.0798639666854985e-22, 4.2061820835623470e-24], [-2.2718223523805741e-21, 9.2443241652517561e-22, 1.1006845036750088e-21, 2.2330046869277633e-22, 1.0946225794399116e-23, -1.8446482392440717e-26]],
        [[1.0201572496254335e-1, 4.6613896660322645e-2, 9.2364955461097607e-3, 6.9917084065254019e-4, 1.5357798341721101e-5, 4.7684609999620298e-8], [-2.0386489070976907e-3, -9.3380215570428404e-4, -1.8604645710752236e-4, -1.4225344231688450e-5, -3.1843668941630823e-7, -1.0335075683775805e-9], [3.0165423826936234e-5, 1.4194667979644203e-5, 2.9959956066638261e-6, 2.5271109981469612e-7, 6.6551602246934142e-9, 2.9233983215696332e-11], [-4.5855964267745007e-7, -2.5548202804127546e-7, -7.1224609299811820e-8, -8.3363106728632866e-9, -3.1110070788213797e-10, -2.0039922356701106e-12], [4.8782449167267613e-9, 5.7972664896072851e-9, 2.7605282124473420e-9, 4.4279227191264152e-10, 2.0171661662676345e-11, 1.5254156001446691e-13], [6.4864237772333489e-11, -1.6780573777580703e-10, -1.2347817825797997e-10, -2.2734247871669147e-11, -1.1225365037855495e-12, -9.3355822502645124e-15], [-5.6153402118090315e-12, 4.8555050441738765e-12, 4.4311721305553192e-12, 8.7255547897246996e-13, 4.6093447013391053e-14, 4.3484381730416211e-16], [1.1259193162559817e-13, -8.8663942876357424e-14, -8.8670407529201235e-14, -1.9332623591507271e-14, -1.1950217742033841e-15, -1.4879973417048011e-17], [4.1386590466340184e-15, -1.1684603896969197e-15, -1.2464045479543303e-15, -1.3039412039184329e-16, 5.9858636786386213e-18, 3.4870530511913103e-19], [-3.8393297199786771e-16, 1.5593453170463500e-16, 1.6813425791558339e-16, 2.8697643930702302e-17, 9.4289235607546123e-19, -5.6565743293724626e-21], [1.1595761156529426e-17, -4.8320188435258939e-18, -5.2414771570932435e-18, -9.1655012336320009e-19, -3.1358012418639461e-20, 2.2794874400243422e-22], [6.2783278023105676e-20, -2.8474065976067365e-20, -3.5545298477866414e-20, -8.9353151448113916e-21, -7.8015930295276395e-22, -2.2061699078027775e-23], [-2.0924248739819643e-20, 8.9005707233726477e-21, 1.0115754743596879e-20, 2.0089638404515907e-21, 1.0795427904599819e-22, 1.4106715511770414e-24], [8.6078953508559148e-22, -3.6531340521550803e-22, -4.1370487470105977e-22, -8.1465033767831058e-23, -4.2973501548262651e-24, -5.4943874349840269e-26]],
        [[9.8163300543712621e-2, 4.4851109591986952e-2, 8.8860913722227777e-3, 6.7249139640747952e-4, 1.4765305714293607e-5, 4.5797190919605366e-8], [-1.8179525345743403e-3, -8.3114932975151345e-4, -1.6490087022869677e-4, -1.2511435937423352e-5, -2.7601107999182107e-7, -8.6546047720646873e-10], [2.5153393159543265e-5, 1.1592808704830296e-5, 2.3411589683142862e-6, 1.8336287420213603e-7, 4.2828043931902088e-9, 1.5168406647590029e-11], [-3.7624347356599987e-7, -1.8410963487848765e-7, -4.1902015773147501e-8, -3.9340794727924118e-9, -1.1852906458752778e-10, -6.1100485659553056e-13], [5.1177226884814793e-9, 3.4008119073668515e-9, 1.1486176065490610e-9, 1.5437500591174188e-10, 6.2848863898207350e-12, 4.2290477496052771e-14], [-2.6785291638857556e-11, -8.1394635819154634e-11, -4.7243284722434483e-11, -8.0543752149574373e-12, -3.7387135838208646e-13, -2.7935434377976685e-15], [-2.0787821951476334e-12, 2.4395483164604629e-12, 2.0236928917802891e-12, 3.7920184914179282e-13, 1.8626146687892995e-14, 1.4969742065398819e-16], [1.0686514302525617e-13, -7.0901650126822826e-14, -6.9446196544598618e-14, -1.3666726977596488e-14, -7.0692215315274698e-16, -6.2733038894979239e-18], [-2.3499105754772924e-15, 1.3811512345035348e-15, 1.4711246074401731e-15, 3.1072809498067305e-16, 1.7945128479104849e-17, 1.9598822101283496e-19], [-2.8163971858671475e-17, 7.2789363420597159e-18, 6.4662655941227819e-18, 9.8215911662073813e-21, -1.3017575940488892e-19, -3.9276626736505959e-21], [4.6048790563202080e-18, -1.9161204877846235e-18, -2.0611987772447079e-18, -3.5867923195867504e-19, -1.2958194831795305e-20, 1.5450433401074494e-23], [-1.9012643683578931e-19, 8.0263606083627730e-20, 8.8427745083683866e-20, 1.6232031499899121e-20, 6.7578999553246823e-22, 1.5649921597565886e-24], [3.2134801704221433e-21, -1.3389782341230125e-21, -1.5028116448155125e-21, -2.7982480558307955e-22, -1.1529522930559625e-23, 8.3404443405269527e-27], [9.1408017641224981e-23, -3.9527020532747904e-23, -4.4190412083345492e-23, -8.6562980275245879e-24, -4.5879521276764976e-25, -6.1506503091567393e-27]],
        [[9.4715272742342466e-2, 4.3275139825068941e-2, 8.5736088502024463e-3, 6.4880917917260818e-4, 1.4243955646227023e-5, 4.4170365226676527e-8], [-1.6334469619514443e-3, -7.4642514169150835e-4, -1.4792803377784746e-4, -1.1200974941239817e-5, -2.4616797734975619e-7, -7.6516673115970919e-10], [2.1105719121701802e-5, 9.6649258083952569e-6, 1.9243907954815444e-6, 1.4695145485711392e-7, 3.2799756306278581e-9, 1.0548809526765256e-11], [-3.0049417441667733e-7, -1.4012463532898571e-7, -2.9011095017115345e-8, -2.3689183773808102e-9, -5.9144782057215066e-11, -2.3469703581999372e-13], [4.2810724518556419e-9, 2.2230021020116860e-9, 5.5879931433443743e-10, 5.8844902173715700e-11, 1.9824337049524793e-12, 1.1252798021619445e-14], [-4.9282500171724202e-11, -4.1812995318499298e-11, -1.6880261500991744e-11, -2.4908857115466032e-12, -1.0615318904239885e-13, -7.2329986933118429e-16], [-1.1833502704112625e-13, 1.0408261637523634e-12, 6.9697561645790551e-13, 1.2284835472952719e-13, 5.7356434939502467e-15, 4.2131823776000484e-17], [3.7634900223913303e-14, -3.1655784335138258e-14, -2.8357596065138948e-14, -5.3537319296671301e-15, -2.6082782627075319e-16, -2.0303560702143077e-18], [-1.6076919376231252e-15, 9.2306328086563197e-16, 9.4302611093108374e-16, 1.8479337424833411e-16, 9.3719151092846849e-18, 7.8839566703703954e-20], [3.8565798915668770e-17, -1.9671908746145433e-17, -2.1583745212557535e-17, -4.4380490386592065e-18, -2.4253029867601566e-19, -2.3643220466495510e-21], [-1.2091773980496125e-19, 8.4121101934003811e-20, 1.1920159952016469e-19, 3.5393771084962356e-20, 2.9507628741865732e-21, 4.7850671995688019e-23], [-3.7694925314118030e-20, 1.5948798938397210e-20, 1.6808506695288922e-20, 2.8525399652281999e-21, 9.6670044416265960e-23, -2.2613901441863943e-25], [1.9974389460323441e-21, -8.5092494486488372e-22, -9.3428173121866276e-22, -1.7201731854677412e-22, -7.3198409084929874e-24, -2.7146021476371392e-26], [-5.5904536246669524e-23, 2.3568157372312819e-23, 2.6515209823014227e-23, 5.0457037715826094e-24, 2.2945378183965956e-25, 1.0946344346436786e-27]],
        [[9.1606578609903621e-2, 4.1854673902320858e-2, 8.2921388952878784e-3, 6.2750215107556803e-4, 1.3775910625828520e-5, 4.2717116425431895e-8], [-1.4779349808120718e-3, -6.7528307917758438e-4, -1.3379432129342909e-4, -1.0126021339633386e-5, -2.2235084347698830e-7, -6.8980167696646533e-10], [1.7878507172192420e-5, 8.1729419342143292e-6, 1.6210964651179009e-6, 1.2293428240518344e-7, 2.7091938121002813e-9, 8.4708862952465903e-12], [-2.3976719057438892e-7, -1.1013871327975214e-7, -2.2079575650151241e-8, -1.7064544414842387e-9, -3.8898771114799245e-11, -1.3052388111080584e-13], [3.3274725579067436e-9, 1.5793803280461748e-9, 3.3892972715943430e-10, 2.9244193767837300e-11, 7.8863324498260065e-13, 3.4788159756155461e-15], [-4.4095924835365176e-11, -2.4739779976052557e-11, -6.9321765366807709e-12, -8.0712548712457067e-13, -2.9385533983506934e-14, -1.7548706999534258e-16], [4.0511772937737427e-13, 4.7127453200729890e-13, 2.2046700360299659e-13, 3.4516060066116052e-14, 1.5053938961887743e-15, 1.0246715269794002e-17], [5.5347851735123688e-15, -1.1985906645819855e-14, -8.8565217247499871e-15, -1.5893424567786084e-15, -7.4176380044756742e-17, -5.3495197246891516e-19], [-5.1606230460540691e-16, 3.6340767976991241e-16, 3.4158000637587431e-16, 6.4626943495773553e-17, 3.1195970399880520e-18, 2.3587929004815484e-20], [1.9943992471900421e-17, -1.0554900075943688e-17, -1.1041062822013273e-17, -2.1512241815696953e-18, -1.0720044469601214e-19, -8.6178435948176751e-22], [-5.0546248411842351e-19, 2.4113242287591656e-19, 2.6750143564191991e-19, 5.3919286086604162e-20, 2.8302472239320060e-21, 2.5273857715702439e-23], [5.9330519614701088e-21, -2.7329568988978297e-21, -3.3273679809505393e-21, -7.4897187608033452e-22, -4.6378239913715037e-23, -5.4266298487275438e-25], [1.9256291731360139e-22, -8.3376977498688908e-23, -8.2294441519388693e-23, -1.2373932389168123e-23, -2.4987178094058184e-25, 5.3943106376045034e-27], [-1.4842781427569021e-23, 6.3946820897069428e-24, 6.9212306286406186e-24, 1.2536609680908236e-24, 5.1662003531622204e-26, 1.7313811226823195e-28]],
        [[8.8011223227689993e-2, 4.0211948688414979e-2, 7.9666768827490715e-3, 6.0287172805358322e-4, 1.3235133662034859e-5, 4.1039905704176604e-8], [-2.0968389065859297e-3, -9.5804064617508978e-4, -1.8980602118487059e-4, -1.4363648592229232e-5, -3.1534123741601716e-7, -9.7787880194350586e-10], [3.7464273444089199e-5, 1.7118596490844339e-5, 3.3920679718611812e-6, 2.5677049654029940e-7, 5.6400920494592742e-9, 1.7509147681025037e-11], [-7.4346467271916174e-7, -3.3998337327892145e-7, -6.7486510900221251e-8, -5.1246447776021491e-9, -1.1320235084906812e-10, -3.5565179271672624e-13], [1.5448840099400544e-8, 7.1081827833653315e-9, 1.4300007891725033e-9, 1.1118216798273569e-10, 2.5591894985801422e-12, 8.7325985462956362e-15], [-3.2507077602073788e-10, -1.5506243962988892e-10, -3.3591071143658813e-11, -2.9357566467693255e-12, -8.0297610325286409e-14, -3.5767347224947964e-16], [6.4685317269865610e-12, 3.6571580997140855e-12, 1.0335501043037002e-12, 1.2085614238232441e-13, 4.3878335388419173e-15, 2.5759471327300110e-17], [-8.9836279847731199e-14, -1.0371860434498043e-13, -4.8248476071075612e-14, -7.5009126531861923e-15, -3.2326950843670634e-16, -2.1423184761684366e-18], [-1.7427937699377122e-15, 3.9161288300272185e-15, 2.8679818926338323e-15, 5.1031004608619132e-16, 2.3473761339832369e-17, 1.6377681161011054e-19], [2.5827051943386355e-16, -1.8105183645367349e-16, -1.6939991756599982e-16, -3.1744430820007161e-17, -1.5044940510071334e-18, -1.0895502014976487e-20], [-1.6214100063094702e-17, 8.4588467605322789e-18, 8.8167117584996052e-18, 1.6946502424680904e-18, 8.2241020231971837e-20, 6.2144171891867136e-22], [7.3665050367851733e-19, -3.4448527355246766e-19, -3.7860422535388381e-19, -7.4369349835786530e-20, -3.7205125706953607e-21, -2.9901895250950125e-23], [-2.3675325039111855e-20, 1.0506585729674657e-20, 1.2057638602461615e-20, 2.4538726152849276e-21, 1.2996373635991510e-22, 1.1682169502658072e-24], [3.0880495129072987e-22, -1.2829213469728282e-22, -1.7083914691162493e-22, -4.0707602021526326e-23, -2.6775708096870948e-24, -3.3051633626552181e-26]],
        [[8.4091680216555140e-2, 3.8421123216184699e-2, 7.6118822615473779e-3, 5.7602275167634409e-4, 1.2645697940077960e-5, 3.9212119159131307e-8], [-1.8290526751391093e-3, -8.3568644065139231e-4, -1.6556388687387908e-4, -1.2528919972682123e-5, -2.7505375722308009e-7, -8.5289715073579638e-10], [2.9836123635381218e-5, 1.3632072253897088e-5, 2.7007802796976926e-6, 2.0438373398403817e-7, 4.4871044120875307e-9, 1.3914819442570203e-11], [-5.4075189460554321e-7, -2.4708517626907446e-7, -4.8959611675855196e-8, -3.7060258104091486e-9, -8.1400758520927172e-11, -2.5266825893756019e-13], [1.0287807852551577e-8, 4.7036130691536256e-9, 9.3323990136326473e-10, 7.0807241459531600e-11, 1.5616803561063831e-12, 4.8889531796643044e-15], [-2.0095366012817227e-10, -9.2255586497136634e-11, -1.8469478765315953e-11, -1.4236430660064116e-12, -3.2273540193056016e-14, -1.0672448581197175e-16], [3.9594019263183186e-12, 1.8596449165728079e-12, 3.9053331515270366e-13, 3.2556379346278994e-14, 8.3348018095401490e-16, 3.3704413110518808e-18], [-7.5603775535643652e-14, -3.9439801673869586e-14, -9.9579488341582818e-15, -1.0462777006682162e-15, -3.4644756093572614e-17, -1.8600889949001641e-19], [1.1970747834122795e-15, 9.5255224519564511e-16, 3.6685175174837039e-16, 5.2215122402753778e-17, 2.1313865812286170e-18, 1.3369497416883623e-20], [-1.1974769507945197e-18, -2.9610627944726352e-17, -1.8674025715018568e-17, -3.1828794413009917e-18, -1.4200018552404559e-19, -9.4677601197276290e-22], [-1.3435350517369422e-18, 1.1971036487266286e-18, 1.0385081261138503e-18, 1.9019104856964963e-19, 8.7878608583900276e-21, 6.0546871237522681e-23], [9.6449207593774790e-20, -5.4029980405194504e-20, -5.4336434322443401e-20, -1.0248722839649069e-20, -4.8311283136956753e-22, -3.4267680625697032e-24], [-4.8947140283067383e-21, 2.3445810649924563e-21, 2.5161447032174202e-21, 4.8278344329662909e-22, 2.3184506323043850e-23, 1.7027247006479266e-25], [1.9872668354609398e-22, -8.9195452635822163e-23, -9.9111081463322730e-23, -1.9331527515998771e-23, -9.5097993511112390e-25, -7.3329278843742765e-27]],
        [[8.0653508318506794e-2, 3.6850237245182780e-2, 7.3006627827443874e-3, 5.5247147084725458e-4, 1.2128665230099954e-5, 3.7608887887350239e-8], [-1.6137966652863611e-3, -7.3733669021096740e-4, -1.4607902449087974e-4, -1.1054407052078288e-5, -2.4268260494571639e-7, -7.5251682494801376e-10], [2.4217040309884719e-5, 1.1064664360923974e-5, 2.1921011119544565e-6, 1.6588562040378929e-7, 3.6417733769510389e-9, 1.1292560257574724e-11], [-4.0378129090227422e-7, -1.8448686830369019e-7, -3.6550417916351059e-8, -2.7659766316622677e-9, -6.0724867467533780e-11, -1.8831014390986109e-13], [7.0688609322256605e-9, 3.2299054485683544e-9, 6.3997466668264553e-10, 4.8439559486699888e-11, 1.0637999937084663e-12, 3.3010454038891458e-15], [-1.2726603865065158e-10, -5.8172574755959077e-11, -1.1535933864599029e-11, -8.7443711731801483e-13, -1.9253318869938443e-14, -6.0055362892354031e-17], [2.3312566258702327e-12, 1.0681850983509229e-12, 2.1294695934411497e-13, 1.6291918959980390e-14, 3.6452882825419356e-16, 1.1739219370340201e-18], [-4.3026759661368403e-14, -1.9969628841678705e-14, -4.0915170143846981e-15, -3.2783386787775569e-16, -7.9065319693784612e-18, -2.9075273883545526e-20], [7.8284746328150656e-16, 3.8508252331502178e-16, 8.8233062960519314e-17, 8.2921190071397483e-18, 2.4540491972843307e-19, 1.1736377878804102e-21], [-1.3001486361577839e-17, -8.0516814289754478e-18, -2.5174590680982957e-18, -3.1581553885394398e-19, -1.1888507015505039e-20, -6.9634593277108075e-23], [1.3079692015269801e-19, 2.0324700798061180e-19, 1.0311477730825865e-19, 1.6386354359054607e-20, 7.0225431900793750e-22, 4.4828396129137496e-24], [4.1635945257818132e-21, -6.7486226897355697e-21, -5.1381322169620365e-21, -9.1106314540487116e-22, -4.1062411836481954e-23, -2.7201036015855238e-25], [-4.1633877007646550e-22, 2.7372063604037065e-22, 2.5884289696373535e-22, 4.7900589176671732e-23, 2.2078459823777191e-24, 1.4985163888673521e-26], [2.2885683756057713e-23, -1.1616914728648499e-23, -1.2081187316064292e-23, -2.2792972656304484e-24, -1.0664784729210248e-25, -7.4118740601356264e-28]],
        [[7.7605548634404588e-2, 3.5457637710405636e-2, 7.0247649733797410e-3, 5.3159313738140568e-4, 1.1670313368163004e-5, 3.6187618125796456e-8], [-1.4376946533895408e-3, -6.5687643595499388e-4, -1.3013846620344953e-4, -9.8481181940931121e-6, -2.1620035680810426e-7, -6.7039982372029776e-10], [1.9975119202157597e-5, 9.1265452867690639e-6, 1.8081249228959709e-6, 1.3682833191800452e-7, 3.0038569076704360e-9, 9.3144417250912407e-12], [-3.0836595510264963e-7, -1.4089110937426142e-7, -2.7912959983258165e-8, -2.1122921735982715e-9, -4.6372237271517036e-11, -1.4379284922131211e-13], [4.9983980235194630e-9, 2.2837548424440155e-9, 4.5245459587024197e-10, 3.4239603590335013e-11, 7.5169638859821724e-13, 2.3309910229712784e-15], [-8.3334186504618610e-11, -3.8076308456802882e-11, -7.5441208776715791e-12, -5.7096820040730695e-13, -1.2537508129557189e-14, -3.8893564179853289e-17], [1.4149572961900340e-12, 6.4664771602254870e-13, 1.2818102096979391e-13, 9.7091680833396175e-15, 2.1349926492378977e-16, 6.6417227366830698e-19], [-2.4323721107757330e-14, -1.1130388819448527e-14, -2.2124666366263514e-15, -1.6840586775601337e-16, -3.7345521564695365e-18, -1.1812631943306656e-20], [4.2100945761377542e-16, 1.9392210548574233e-16, 3.9097086600858286e-17, 3.0492772476150559e-18, 7.0427680651864906e-20, 2.4022858607495515e-22], [-7.2544978383078082e-18, -3.4412412177266301e-18, -7.3674771046646591e-19, -6.3129738398050785e-20, -1.6712695529678056e-21, -6.9906109630586963e-24], [1.1994692457892150e-19, 6.3913954870855547e-20, 1.6623944036863942e-20, 1.7915456622016700e-21, 6.0104010556747249e-23, 3.1964722344198282e-25], [-1.6432471528009305e-21, -1.3372179497549756e-21, -5.2047843555105356e-22, -7.3949595180845934e-23, -2.9790178952725811e-24, -1.8055773094419813e-26], [2.6761770943738107e-24, 3.5197302727217081e-23, 2.1815715383966110e-23, 3.6678310291487685e-24, 1.6028508092917798e-25, 1.0241552636157770e-27], [1.2688919506428226e-24, -1.1946241335959228e-24, -1.0140684011661211e-24, -1.8295202795243419e-25, -8.2568416128570197e-27, -5.4139355483291651e-29]],
        [[7.4879125476300779e-2, 3.4211946824685542e-2, 6.7779722857508245e-3, 5.1291730982716030e-4, 1.1260314169392393e-5, 3.4916281699349312e-8], [-1.2914514300140619e-3, -5.9005854262926455e-4, -1.1690069757555342e-4, -8.8463612416207814e-6, -1.9420831574732546e-7, -6.0220631164222893e-10], [1.6704977252920526e-5, 7.6324314745566053e-6, 1.5121153259008504e-6, 1.1442804653011554e-7, 2.5120925681454116e-9, 7.7895635522226299e-12], [-2.4008691718196110e-7, -1.0969467044913525e-7, -2.1732392755473155e-8, -1.6445805197837524e-9, -3.6104251314774846e-11, -1.1195304726642888e-13], [3.6230913219067665e-9, 1.6553750518842509e-9, 3.2795829723924619e-10, 2.4817987775043144e-11, 5.4484172274004686e-13, 1.6894644530742979e-15], [-5.6237185190662260e-11, -2.5694584224895982e-11, -5.0905622383469478e-12, -3.8522731113522780e-13, -8.4572002282075216e-15, -2.6225052619682455e-17], [8.8906463099344240e-13, 4.0621731637206461e-13, 8.0481851360304173e-14, 6.0908242294795930e-15, 1.3373080168005495e-16, 4.1477242793543283e-19], [-1.4237256533795432e-14, -6.5057677304055154e-15, -1.2892600509180882e-15, -9.7610734470699352e-17, -2.1446685177931052e-18, -6.6609571111852366e-21], [2.3012361600718246e-16, 1.0522124477534035e-16, 2.0880084737637102e-17, 1.5845822092722354e-18, 3.4957390624213688e-20, 1.0943302345863445e-22], [-3.7423740838476156e-18, -1.7164894915788903e-18, -3.4292167765798076e-19, -2.6329734911992884e-20, -5.9245680320183992e-22, -1.9256289055476256e-24], [6.0882422856867645e-20, 2.8312293669262550e-20, 5.8233349902169534e-21, 4.6921596369226018e-22, 1.1391566725232443e-23, 4.2076995896598471e-26], [-9.7403418772647800e-22, -4.7839626518939968e-22, -1.0922826805554377e-22, -1.0197264659054547e-23, -2.9808060905761453e-25, -1.3885491225486802e-27], [1.4435595094121092e-23, 8.6301415853427069e-24, 2.5925642620020402e-24, 3.1460301353380063e-25, 1.1483900955918909e-26, 6.4566114171433260e-29], [-1.5075653110443057e-25, -1.8152886102955098e-25, -8.4941492481591759e-26, -1.3022715679890120e-26, -5.4252129678788959e-28, -3.3261108647961566e-30]],
        [[7.2421382782338853e-2, 3.3089014875080944e-2, 6.5555002448452842e-3, 4.9608192662870549e-4, 1.0890719109210814e-5, 3.3770231505364385e-8], [-1.1684288687240159e-3, -5.3385006930815308e-4, -1.0576483685852210e-4, -8.0036644159854877e-6, -1.7570819721673098e-7, -5.4484065175161254e-10], [1.4138052405143937e-5, 6.4596146661169079e-6, 1.2797602373369725e-6, 9.6844771651832063e-8, 2.1260786756373173e-9, 6.5926013144948763e-12], [-1.9007807746547609e-7, -8.6845847136689440e-8, -1.7205648927959518e-8, -1.3020229089833673e-9, -2.8583919503367829e-11, -8.8633778884069653e-14], [2.6832604458129370e-9, 1.2259700456133018e-9, 2.4288565824122179e-10, 1.8380167278242318e-11, 4.0350846194505436e-13, 1.2512099618786138e-15], [-3.8960774947697267e-11, -1.7801011151547547e-11, -3.5266860845163388e-12, -2.6687912103569553e-13, -5.8589276336322984e-15, -1.8167548849387635e-17], [5.7618346203027581e-13, 2.6325604580278246e-13, 5.2155669253853524e-14, 3.9468544636087087e-15, 8.6647828843948086e-17, 2.6868389914806128e-19], [-8.6316963957102527e-15, -3.9438212905180502e-15, -7.8135426440433857e-16, -5.9130390414741091e-17, -1.2981942134383683e-18, -4.0259300153959778e-21], [1.3055030241234162e-16, 5.9651456754033856e-17, 1.1819516648608127e-17, 8.9463471537169540e-19, 1.9647913779994152e-20, 6.0969801553586625e-23], [-1.9889030118978162e-18, -9.0903140107091769e-19, -1.8022805256088976e-19, -1.3656184442813581e-20, -3.0045992745086225e-22, -9.3561759798603273e-25], [3.0461607357324121e-20, 1.3941737456308837e-20, 2.7724098075192105e-21, 2.1116222162221957e-22, 4.6870438733397978e-24, 1.4842761747038176e-26], [-4.6765182064846989e-22, -2.1533727927260262e-22, -4.3381373905192765e-23, -3.3781225737501656e-24, -7.7764155371654739e-26, -2.6300625825238995e-28], [7.1410365632962988e-24, 3.3683532630722760e-24, 7.1292355915412442e-25, 6.0004809526225238e-26, 1.5473306771895204e-27, 6.2064187884271430e-30], [-1.0576737107561989e-25, -5.4419907629916594e-26, -1.3415678463829864e-26, -1.3661155953797505e-27, -4.3387071215145836e-29, -2.1731658273094864e-31]],
        [[7.0190885489234510e-2, 3.2069910360987054e-2, 6.3535981961775992e-3, 4.8080316016502714e-4, 1.0555297186016407e-5, 3.2730146283742099e-8], [-1.0637730654971658e-3, -4.8603328789976740e-4, -9.6291513961924719e-5, -7.2867787323775421e-6, -1.5997006971131338e-7, -4.9603944734136778e-10], [1.2091222387146398e-5, 5.5244269310557844e-6, 1.0944835389041963e-6, 8.2824114463910833e-8, 1.8182766145851732e-9, 5.6381604925302730e-12], [-1.5270274370518504e-7, -6.9769219587222514e-8, -1.3822476669588344e-8, -1.0460042105171763e-9, -2.2963420829132700e-11, -7.1205586166282393e-14], [2.0249389742201136e-9, 9.2518581266558722e-10, 1.8329514653345620e-10, 1.3870704944277348e-11, 3.0451008978033949e-13, 9.4423299347861019e-16], [-2.7619198903247686e-11, -1.2619091978144177e-11, -2.5000581692292136e-12, -1.8918978918059329e-13, -4.1533723396559413e-15, -1.2878888587521618e-17], [3.8368859908330950e-13, 1.7530566571301697e-13, 3.4731058806916039e-14, 2.6282441841446612e-15, 5.7699103817715363e-17, 1.7891507208217363e-19], [-5.3994601070747812e-15, -2.4669913575554826e-15, -4.8875386359400397e-16, -3.6986118953095910e-17, -8.1197672211284976e-19, -2.5178170658821576e-21], [7.6714408415706371e-17, 3.5050630732427645e-17, 6.9441945887491778e-18, 5.2550449324230716e-19, 1.1536958947934486e-20, 3.5775929818930760e-23], [-1.0980054448334603e-18, -5.0168726735539650e-19, -9.9398555292310356e-20, -7.5226503776900729e-21, -1.6517604091558541e-22, -5.1234495905298196e-25], [1.5807296993379065e-20, 7.2233420235614211e-21, 1.4315208083941150e-21, 1.0838856243691229e-22, 2.3817160093667617e-24, 7.3983173569859143e-27], [-2.2860321021477304e-22, -1.0452339025359341e-22, -2.0740313042136504e-23, -1.5737697128329916e-24, -3.4708873565720183e-26, -1.0856993884564359e-28], [3.3158610779322857e-24, 1.5199251696205066e-24, 3.0323795588193345e-25, 2.3225890170975029e-26, 5.2032675285982833e-28, 1.6757464455677480e-30], [-4.8068225009907070e-26, -2.2254646561402177e-26, -4.5350416062996258e-27, -3.5982578358231477e-28, -8.5246370988621578e-30, -3.0196642969879588e-32]],
        [[6.8154629449884003e-2, 3.1139553831092489e-2, 6.1692786423153183e-3, 4.6685493409833685e-4, 1.0249085239944451e-5, 3.1780636136169482e-8], [-9.7386120170382312e-4, -4.4495294830658507e-4, -8.8152795499663585e-5, -6.6708881085868343e-6, -1.4644913410433822e-7, -4.5411337055602576e-10], [1.0436446255801160e-5, 4.7683669122847263e-6, 9.4469510739469699e-7, 7.1489001822812390e-8, 1.5694315726062605e-9, 4.8665351669896909e-12], [-1.2426930259688817e-7, -5.6778103982229437e-8, -1.1248714292767858e-8, -8.5123692320510951e-10, -1.8687603253615093e-11, -5.7947017257555933e-14], [1.5536873910769816e-9, 7.0987301292955281e-10, 1.4063799505540208e-10, 1.0642661116116366e-11, 2.3364332903724648e-13, 7.2448744981396526e-16], [-1.9980093132827638e-11, -9.1288176743762197e-12, -1.8085750445483021e-12, -1.3686238431574861e-13, -3.0046040943647051e-15, -9.3167563399613545e-18], [2.6169781287089513e-13, 1.1956859323362043e-13, 2.3688585238166797e-14, 1.7926136446345735e-15, 3.9354088770446731e-17, 1.2203021103686221e-19], [-3.4722134658126215e-15, -1.5864392924636071e-15, -3.1430080452766168e-16, -2.3784450319930525e-17, -5.2215130697443642e-19, -1.6191013379641183e-21], [4.6512380396440645e-17, 2.1251310296647287e-17, 4.2102508752324186e-18, 3.1860749763262563e-19, 6.9945518527162142e-21, 2.1688961735602608e-23], [-6.2767596140013674e-19, -2.8678295292108926e-19, -5.6816840650549763e-20, -4.2995960500456094e-21, -9.4392141321348688e-23, -2.9269995984084475e-25], [8.5201625092782032e-21, 3.8928684307839953e-21, 7.7126234718950911e-22, 5.8367033839724982e-23, 1.2814475748253729e-24, 3.9740600658542276e-27], [-1.1620493289085340e-22, -5.3096686237085522e-23, -1.0520713389364551e-23, -7.9632248916212633e-25, -1.7488557467729946e-26, -5.4266876025694843e-29], [1.5910443469718299e-24, 7.2715197917406058e-25, 1.4415140578841597e-25, 1.0920325871022304e-26, 2.4017568684191394e-28, 7.4729375913251284e-31], [-2.1851348467008874e-26, -9.9959946133005353e-27, -1.9859009816863814e-27, -1.5100732460125728e-28, -3.3421384548680849e-30, -1.0519250412417334e-32]],
        [[6.6285955974127479e-2, 3.0285765045785638e-2, 6.0001284692970199e-3, 4.5405463807417422e-4, 9.9680743402705669e-6, 3.0909270063612371e-8], [-8.9594026053392954e-4, -4.0935120911858782e-4, -8.1099481557107957e-5, -6.1371345521756997e-6, -1.3473139204523868e-7, -4.1777868428895414e-10], [9.0822035888737269e-6, 4.1496193265732319e-6, 8.2211061931163064e-7, 6.2212524551531254e-8, 1.3657807180559595e-9, 4.2350491801129380e-12], [-1.0229614096784700e-7, -4.6738661982219721e-8, -9.2597289833179013e-9, -7.0072214515087468e-10, -1.5383281766191885e-11, -4.7700889293667967e-14], [1.2098064796131594e-9, 5.5275531979636344e-10, 1.0951029058905662e-10, 8.2870984535604887e-12, 1.8193055752347118e-13, 5.6413511210352092e-16], [-1.4716572950975824e-11, -6.7239381876781670e-12, -1.3321272514130425e-12, -1.0080760106182306e-13, -2.2130765271543272e-15, -6.8623665643739352e-18], [1.8233339130258727e-13, 8.3307333643243155e-14, 1.6504608807889966e-14, 1.2489722883703960e-15, 2.7419274227952479e-17, 8.5022415077672533e-20], [-2.2883870997107568e-15, -1.0455541171497884e-15, -2.0714216869451029e-16, -1.5675308224783956e-17, -3.4412739466240554e-19, -1.0670794032235421e-21], [2.8996704999557978e-17, 1.3248468645950646e-17, 2.6247485123781840e-18, 1.9862563194373976e-19, 4.3605220610821881e-21, 1.3521225301307302e-23], [-3.7014584179963118e-19, -1.6911804581024772e-19, -3.3505188357082939e-20, -2.5354778571389966e-21, -5.5662574765030642e-23, -1.7260022333695856e-25], [4.7527407843417459e-21, 2.1715082602730691e-21, 4.3021366471595881e-22, 3.2556146383298348e-23, 7.1472369761699956e-25, 2.2162533589466819e-27], [-6.1317956721562379e-23, -2.8016032116560625e-23, -5.5505081172696816e-24, -4.2003682740974825e-25, -9.2215159544902604e-27, -2.8595754060008039e-29], [7.9423772480379071e-25, 3.6289299099792956e-25, 7.1898783227709826e-26, 5.4413344941091240e-27, 1.1947365404421004e-28, 3.7056688285378474e-31], [-1.0327104891465176e-26, -4.7182545515372058e-27, -9.3511184317847068e-28, -7.0781667262980013e-29, -1.5550577419893238e-30, -4.8297234122259401e-33]],
        [[6.4563064276504367e-2, 2.9498583320988387e-2, 5.8441742951057503e-3, 4.4225293808042891e-4, 9.7089860874158383e-6, 3.0105882317451268e-8], [-8.2788470469722973e-4, -3.7825692159054604e-4, -7.4939170944268642e-5, -5.6709582661094491e-6, -1.2449720548370741e-7, -3.8604424637111050e-10], [7.9617932530346091e-6, 3.6377087161365556e-6, 7.2069236480252376e-7, 5.4537784072075009e-8, 1.1972935422262108e-9, 3.7125996635659698e-12], [-8.5076171021804034e-8, -3.8870932593430973e-8, -7.7009971162814363e-9, -5.8276643180827478e-10, -1.2793744690986399e-11, -3.9671183849526349e-14], [9.5453900447260274e-10, 4.3612472041258366e-10, 8.6403772437514579e-11, 6.5385322702872608e-12, 1.4354346433492079e-13, 4.4510339244491121e-16], [-1.1015737588185434e-11, -5.0330426030565341e-12, -9.9713189229950380e-13, -7.5457111091621592e-14, -1.6565453357278243e-15, -5.1366598409345045e-18], [1.2947986680523357e-13, 5.9158788111847487e-14, 1.1720368570200235e-14, 8.8692896105068827e-16, 1.9471167294648230e-17, 6.0376713484274146e-20], [-1.5416815582792529e-15, -7.0438760018294848e-16, -1.3955124091645631e-16, -1.0560421920296826e-17, -2.3183789351829743e-19, -7.1888910789942201e-22], [1.8532883662451823e-17, 8.4675939645660949e-18, 1.6775753109540392e-18, 1.2694909069555869e-19, 2.7869729200189443e-21, 8.6419198500730106e-24], [-2.2443801075069069e-19, -1.0254475188855824e-19, -2.0315870958298564e-20, -1.5373863612371058e-21, -3.3750964989678875e-23, -1.0465589808938872e-25], [2.7339902853280776e-21, 1.2491483336805846e-21, 2.4747769281441119e-22, 1.8727668040813688e-23, 4.1113739670877177e-25, 1.2748664538595427e-27], [-3.3463425900586558e-23, -1.5289299492369554e-23, -3.0290738019790012e-24, -2.2922285121840381e-25, -5.0322455823422499e-27, -1.5604174857286697e-29], [4.1121476435485579e-25, 1.8788191711274370e-25, 3.7222820895209341e-26, 2.8168037270088301e-27, 6.1839629557759916e-29, 1.9175831284431285e-31], [-5.0748267240980426e-27, -2.3182438550154300e-27, -4.5941991307902622e-28, -3.4774921235274968e-29, -7.6342487331264038e-31, -2.3678284978589263e-33]],
        [[6.2967929201569070e-2, 2.8769773041558484e-2, 5.6997845034094634e-3, 4.3132636293362308e-4, 9.4691098606034151e-6, 2.9362067732679194e-8], [-7.6803009552072320e-4, -3.5090961093043358e-4, -6.9521200587489296e-5, -5.2609579499441732e-6, -1.1549627632592118e-7, -3.5813392581526420e-10], [7.0257540868218381e-6, 3.2100364913799562e-6, 6.3596317643926820e-7, 4.8125974532752918e-8, 1.0565320814145757e-9, 3.2761227816472329e-12], [-7.1410783078660047e-8, -3.2627276264975542e-8, -6.4640219224160055e-9, -4.8915938208736353e-10, -1.0738745243454864e-11, -3.3298986899938189e-14], [7.6212008450780475e-10, 3.4820935259780793e-10, 6.8986233190379185e-11, 5.2204747454396395e-12, 1.1460752955803360e-13, 3.5537807619687534e-16], [-8.3659873889109000e-12, -3.8223832592150556e-12, -7.5727955293551176e-13, -5.7306488534143012e-14, -1.2580762093107717e-15, -3.9010761744732993e-18], [9.3536212438360808e-14, 4.2736288728912229e-14, 8.4667903315981916e-15, 6.4071718453071184e-16, 1.4065964734107897e-17, 4.3616117600324586e-20], [-1.0593662575524136e-15, -4.8401983651493233e-16, -9.5892614778581707e-17, -7.2565923747963338e-18, -1.5930737445617285e-19, -4.9398454429340757e-22], [1.2113464959319509e-17, 5.5345894658174182e-18, 1.0964969111048513e-18, 8.2976474713132745e-20, 1.8216214510627803e-21, 5.6485322531972662e-24], [-1.3953904096377431e-19, -6.3754781067674663e-20, -1.2630913456429136e-20, -9.5583367512848440e-22, -2.0983864835307335e-23, -6.5067326519910138e-26], [1.6168518795903572e-21, 7.3873259553875228e-22, 1.4635557333426571e-22, 1.1075334123370456e-23, 2.4314200646713174e-25, 7.5394122372378981e-28], [-1.8824247894933269e-23, -8.6007175666160290e-24, -1.7039493667348942e-24, -1.2894494483678781e-25, -2.8307891974594171e-27, -8.7777886335950344e-30], [2.2003595804356154e-25, 1.0053340575069539e-25, 1.9917293959637956e-26, 1.5072191278881305e-27, 3.3089024066849452e-29, 1.0260261466777822e-31], [-2.5867453422290924e-27, -1.1815657246013467e-27, -2.3422477654171551e-28, -1.7700396720315490e-29, -3.8896562639330712e-31, -1.2052780191168362e-33]],
        [[6.1485499848177441e-2, 2.8092457516210722e-2, 5.5655967039534449e-3, 4.2117181490556881e-4, 9.2461823070719448e-6, 2.8670808044848897e-8], [-7.1505645467617934e-4, -3.2670618477989436e-4, -6.4726087567202997e-5, -4.8980918349781476e-6, -1.0753010638459437e-7, -3.3343221416225721e-10], [6.2368359826550498e-6, 2.8495832401288491e-6, 5.6455121734189037e-7, 4.2721935034590879e-8, 9.3789466878090536e-10, 2.9082487368151392e-12], [-6.0442800959816709e-8, -2.7616052928205371e-8, -5.4712128002589802e-9, -4.1402939296388681e-10, -9.0893813696644184e-12, -2.8184595527253924e-14], [6.1505457002475574e-10, 2.8101575853227568e-10, 5.5674032025987573e-11, 4.2130852015992744e-12, 9.2491834616112632e-14, 2.8680114104674711e-16], [-6.4374953683340976e-12, -2.9412636408954858e-12, -5.8271467406437674e-13, -4.4096439232377208e-14, -9.6806980383219408e-16, -3.0018165982363490e-18], [6.8626049502408284e-14, 3.1354943603161849e-14, 6.2119510430766525e-15, 4.7008413187015255e-16, 1.0319977332548126e-17, 3.2000460222641179e-20], [-7.4107960084515683e-16, -3.3859604710516368e-16, -6.7081672817470527e-17, -5.0763487529362613e-18, -1.1144346407538341e-19, -3.4556685778545491e-22], [8.0797257568920674e-18, 3.6915915643382549e-18, 7.3136747936963219e-19, 5.5345614322507198e-20, 1.2150282184591558e-21, 3.7675918194631465e-24], [-8.8742872143861348e-20, -4.0546232392114436e-20, -8.0329026834638130e-21, -6.0788310444227057e-22, -1.3345142781869551e-23, -4.1380973724809761e-26], [9.8043205110908728e-22, 4.4795514136087029e-22, 8.8747581301268927e-23, 6.7158980205391536e-24, 1.4743725796393773e-25, 4.5717737078421111e-28], [-1.0883646203751392e-23, -4.9726900853387024e-24, -9.8517512911298592e-25, -7.4552281521917660e-26, -1.6366816038322625e-27, -5.0750644251231074e-30], [1.2130178906285461e-25, 5.5421169333868363e-26, 1.0980077462360929e-26, 8.3088953894568718e-28, 1.8240936472492688e-29, 5.6562155054222633e-32], [-1.3622360020997769e-27, -6.2161534991321783e-28, -1.2331762449853375e-28, -9.3326162979418279e-30, -2.0516312648646528e-31, -6.3355115242975620e-34]],
        [[6.0103096786389799e-2, 2.7460843568541073e-2, 5.4404631693279065e-3, 4.1170244069698661e-4, 9.0382966956236406e-6, 2.8026190811143514e-8], [-6.6790496302628000e-4, -3.0516287327927189e-4, -6.0457988793326850e-5, -4.5751070765760975e-6, -1.0043947056115847e-7, -3.1144538199108422e-10], [5.5665906502675093e-6, 2.5433510622653128e-6, 5.0388138100670035e-7, 3.8130796574780273e-8, 8.3710325374774077e-10, 2.5957120360435876e-12], [-5.1549003492671341e-8, -2.3552515539381983e-8, -4.6661564863150508e-9, -3.5310743852114025e-10, -7.7519331422537992e-12, -2.4037400487774273e-14], [5.0123352928250512e-10, 2.2901141995817286e-10, 4.5371082375096842e-11, 3.4334182163389188e-12, 7.5375439763957661e-14, 2.3372616859561619e-16], [-5.0129594115886293e-12, -2.2903993567308807e-12, -4.5376731826336611e-13, -3.4338457337747740e-14, -7.5384825254656430e-16, -2.3375527137482774e-18], [5.1064262474583426e-14, 2.3331039476072369e-14, 4.6222782870777991e-15, 3.4978699297135617e-16, 7.6790378444027881e-18, 2.3811364809193945e-20], [-5.2691885193837790e-16, -2.4074693218922158e-16, -4.7696088229592174e-17, -3.6093610644272794e-18, -7.9237995593855996e-20, -2.4570328445640473e-22], [5.4894181843242783e-18, 2.5080912981549782e-18, 4.9689581818082616e-19, 3.7602170026735876e-20, 8.2549806730753776e-22, 2.5597263652365169e-24], [-5.7612138887815495e-20, -2.6322735736707017e-20, -5.2149845265052881e-21, -3.9463953543825867e-22, -8.6637067373014120e-24, -2.6864652303405477e-26], [6.0820339876081793e-22, 2.7788548807264270e-22, 5.5053872104262981e-23, 4.1661551151517874e-24, 9.1461556295257428e-26, 2.8360642808865368e-28], [-6.4514389836817747e-24, -2.9476344433993362e-24, -5.8397675353885091e-25, -4.4191948291350797e-26, -9.7016643007663437e-28, -3.0083184792507067e-30], [6.8708601553392297e-26, 3.1392860591288954e-26, 6.2193934635643360e-27, 4.7064247194468017e-28, 1.0332352775430782e-29, 3.2039677052646836e-32], [-7.3913449458833017e-28, -3.3779446565620094e-28, -6.6848918316541277e-29, -5.0709185170017524e-30, -1.1089573402994004e-31, -3.4460792388706181e-34]],
        [[5.8809952195371023e-2, 2.6870011428032915e-2, 5.3234092087797975e-3, 4.0284448141098364e-4, 8.8438337626152492e-6, 2.7423194975785872e-8], [-6.2571746508808178e-4, -2.8588758892002485e-4, -5.6639225018897867e-5, -4.2861253635408318e-6, -9.4095319534022189e-8, -2.9177326973266215e-10], [4.9930152724431597e-6, 2.2812869662806937e-6, 4.5196199773469986e-7, 3.4201841236368245e-8, 7.5084905522439883e-10, 2.3282527229135005e-12], [-4.4269434876539052e-8, -2.0226512293250789e-8, -4.0072183107095749e-9, -3.0324285039293726e-10, -6.6572324614786761e-12, -2.0642923497950764e-14], [4.1212973603243702e-10, 1.8830028428241792e-10, 3.7305509528704373e-11, 2.8230628250553239e-12, 6.1976021711309307e-14, 1.9217689667542813e-16], [-3.9463734021413945e-12, -1.8030808469722039e-12, -3.5722117985154096e-13, -2.7032410115866098e-14, -5.9345517265174655e-16, -1.8402015851782506e-18], [3.8488520088875676e-14, 1.7585237464579431e-14, 3.4839365553770011e-15, 2.6364394692876069e-16, 5.7878991689077786e-18, 1.7947271700210077e-20], [-3.8024897664785741e-16, -1.7373410395035102e-16, -3.4419699869703881e-17, -2.6046816242238153e-18, -5.7181796827628139e-20, -1.7731083663043840e-22], [3.7928075459587083e-18, 1.7329172750503943e-18, 3.4332057523557010e-19, 2.5980493639369933e-20, 5.7036195708201339e-22, 1.7685935280647750e-24], [-3.8111730127271041e-20, -1.7413083769993849e-20, -3.4498299615728984e-21, -2.6106295934500158e-22, -5.7312375383983935e-24, -1.7771573810202050e-26], [3.8521544116838522e-22, 1.7600325988529108e-22, 3.4869258455568195e-23, 2.6387015941111731e-24, 5.7928653455692115e-26, 1.7962670908011394e-28], [-3.9122029585112403e-24, -1.7874687683932025e-24, -3.5412811947824051e-25, -2.6798344507456416e-26, -5.8831690847820119e-28, -1.8242689477142403e-30], [3.9894921691723441e-26, 1.8226912951169057e-26, 3.6110777059581065e-27, 2.7327229081875880e-28, 5.9994162215120687e-30, 1.8603440767219283e-32], [-4.1360258996775228e-28, -1.8969287410189545e-28, -3.7472653848232929e-29, -2.8392609505855027e-30, -6.2389812716301510e-32, -1.9317738305884667e-34]],
        [[5.7596854518475492e-2, 2.6315752374510530e-2, 5.2136010027999370e-3, 3.9453483846268833e-4, 8.6614082752311043e-6, 2.6857525172014164e-8], [-5.8779186593057366e-4, -2.6855954758117388e-4, -5.3206243418558099e-5, -4.0263373896609661e-6, -8.8392072349220311e-8, -2.7408848915649790e-10], [4.4988951471509904e-6, 2.0555256296736782e-6, 4.0723481250446255e-7, 3.0817149390899922e-8, 6.7654332832413919e-10, 2.0978435484198430e-12], [-3.8259978293449518e-8, -1.7480817712043611e-8, -3.4632492150043887e-9, -2.6207844997420891e-10, -5.7535310803256931e-12, -1.7840702216948674e-14], [3.4164297048066677e-10, 1.5609518760746738e-10, 3.0925128609691638e-11, 2.3402329050324425e-12, 5.1376230115944646e-14, 1.5930878094363455e-16], [-3.1378669662359992e-12, -1.4336777721279075e-12, -2.8403610750259104e-13, -2.1494191774729817e-14, -4.7187206897232097e-16, -1.4631934631965336e-18], [2.9353871388935242e-14, 1.3411656194812900e-14, 2.6570786649524812e-15, 2.0107217665807056e-16, 4.4142317611569939e-18, 1.3687767262906802e-20], [-2.7816344552681117e-16, -1.2709166869131938e-16, -2.5179035047403139e-17, -1.9054021433052797e-18, -4.1830186545688157e-20, -1.2970815511764165e-22], [2.6612804412343954e-18, 1.2159274612499608e-18, 2.4089604359737760e-19, 1.8229603990786750e-20, 4.0020304284177523e-22, 1.2409602405840901e-24], [-2.5649938944140501e-20, -1.1719345566517992e-20, -2.3218029616140930e-21, -1.7570047188035009e-22, -3.8572348313596834e-24, -1.1960616366810018e-26], [2.4867332270340086e-22, 1.1361775939436800e-22, 2.2509623007265623e-23, 1.7033966428895700e-24, 3.7395464859664537e-26, 1.1595685257816408e-28], [-2.4223934977632717e-24, -1.1067811473143197e-24, -2.1927230899200337e-25, -1.6593241885364327e-26, -3.6427953097031640e-28, -1.1295671551272666e-30], [2.3694648753274679e-26, 1.0826665146498261e-26, 2.1448423672865364e-27, 1.6231539475644201e-28, 3.5636513509181518e-30, 1.1050735069642835e-32], [-2.3674279237757722e-28, -1.0831341964722071e-28, -2.1448916710931127e-29, -1.6122784963013146e-30, -3.5492137546564775e-32, -1.0948218528029979e-34]],
        [[5.6455870668938563e-2, 2.5794441815127497e-2, 5.1103204575018234e-3, 3.8671917070567236e-4, 8.4898272568073611e-6, 2.6325482186056139e-8], [-5.5354879017523073e-4, -2.5291403517163507e-4, -5.0106599599645338e-5, -3.7917744699573188e-6, -8.3242602604799566e-8, -2.5812087639786537e-10], [4.0706192899809541e-6, 1.8598482528535138e-6, 3.6846777466734483e-7, 2.7883486649441553e-8, 6.1213925479640253e-10, 1.8981376840862181e-12], [-3.3259957307414929e-8, -1.5196329865686738e-8, -3.0106530681358349e-9, -2.2782862003944353e-10, -5.0016285067072432e-12, -1.5509182716175466e-14], [2.8534603330947178e-10, 1.3037336181635024e-10, 2.5829194629544210e-11, 1.9546024188110671e-12, 4.2910303260019873e-14, 1.3305740975638226e-16], [-2.5180031804968636e-12, -1.1504647038481937e-12, -2.2792675080339361e-13, -1.7248163747330980e-14, -3.7865702505712182e-16, -1.1741497755179190e-18], [2.2631301959528841e-14, 1.0340143455033584e-14, 2.0485594148725535e-15, 1.5502299799963740e-16, 3.4032925532181535e-18, 1.0553020076096814e-20], [-2.0604715367686793e-16, -9.4142048536589557e-17, -1.8651151282735438e-17, -1.4114100704149260e-18, -3.0985346975366329e-20, -9.6080188106856067e-23], [1.8939984456311922e-18, 8.6535965391911354e-19, 1.7144256015369128e-19, 1.2973770478306525e-20, 2.8481926569446585e-22, 8.8317515521663735e-25], [-1.7538713258040397e-20, -8.0133618223628821e-21, -1.5875841448586257e-21, -1.2013908502979027e-22, -2.6374696579174523e-24, -8.1783360697827850e-27], [1.6336650028452012e-22, 7.4641443687891420e-23, 1.4787747680503829e-23, 1.1190502754408937e-24, 2.4567035107904184e-26, 7.6178117405385491e-29], [-1.5289754467896640e-24, -6.9858217002652005e-25, -1.3840106056701492e-25, -1.0473389285577097e-26, -2.2992703635753047e-28, -7.1296448776888723e-31], [1.4370791804826204e-26, 6.5662950466352760e-27, 1.3006661127873708e-27, 9.8425805365876321e-29, 2.1609484241723183e-30, 6.7005596156677794e-33], [-1.3944525179969278e-28, -6.3827299313507223e-29, -1.2581274928134217e-29, -9.6208454707618376e-31, -2.1257451761174116e-32, -6.5505262338393987e-35]],
        [[5.5380126543036353e-2, 2.5302939001783826e-2, 5.0129453369253890e-3, 3.7935039096087097e-4, 8.3280569804265239e-6, 2.5823860609989042e-8], [-5.2250634458037316e-4, -2.3873087676475634e-4, -4.7296673140366261e-5, -3.5791356659697623e-6, -7.8574443251193474e-8, -2.4364572370185605e-10], [3.6973216554681089e-6, 1.6892901868973352e-6, 3.3467730228981737e-7, 2.5326421282550971e-8, 5.5600279998954143e-10, 1.7240682717997179e-12], [-2.9069635471740412e-8, -1.3281790040222087e-8, -2.6313499567563876e-9, -1.9912517846496986e-10, -4.3714883970290193e-12, -1.3555227502451622e-14], [2.3998324090822960e-10, 1.0964729922443400e-10, 2.1723006853663883e-11, 1.6438701379970233e-12, 3.6088651821299789e-14, 1.1190465152028089e-16], [-2.0377764439794966e-12, -9.3105119615817617e-13, -1.8445717913997640e-13, -1.3958640742970250e-14, -3.0644058434290685e-16, -9.5021911520465195e-19], [1.7623858563635243e-14, 8.0522643418878427e-15, 1.5952914000034354e-15, 1.2072232502319536e-16, 2.6502737984694587e-18, 8.2180394911846896e-21], [-1.5440070535114301e-16, -7.0545010876714584e-17, -1.3976174202247740e-17, -1.0576351409033515e-18, -2.3218760090465076e-20, -7.1997348904094566e-23], [1.3656942553208453e-18, 6.2397976665231011e-19, 1.2362107268864315e-19, 9.3549199329943548e-21, 2.0537294307821571e-22, 6.3682588478655309e-25], [-1.2169221563390956e-20, -5.5600644144786098e-21, -1.1015439342842654e-21, -8.3358403910864136e-23, -1.8300061216004874e-24, -5.6745316595347502e-27], [1.0907350972463137e-22, 4.9835210751333775e-23, 9.8732085613143045e-24, 7.4714668891427452e-25, 1.6402461631215830e-26, 5.0861189540168036e-29], [-9.8230695412111876e-25, -4.4881288934742450e-25, -8.8917432443016463e-26, -6.7287405242028189e-27, -1.4771914313727757e-28, -4.5805046382616168e-31], [8.8855601947869296e-27, 4.0598022147105425e-27, 8.0434230048597416e-28, 6.0860266667754087e-29, 1.3361758038097145e-30, 4.1423614869708276e-33], [-8.6225314301032380e-29, -3.9661390690174263e-29, -7.8269792939897265e-30, -5.9186578519511740e-31, -1.2926085171391832e-32, -4.0403420115406053e-35]],
    ],
    [
        [[2.0421377326518839e-1, 1.7854836477836617e-1, 1.3883480622196954e-1, 9.8436068893677469e-2, 6.4441854670702442e-2, 3.7483535671550376e-2, 1.5281562587287985e-2], [-1.0719413373532181e-2, -2.4947450632611304e-2, -4.1925767445502312e-2, -5.0170358911084542e-2, -4.6246665214017779e-2, -3.3068027141180939e-2, -1.4946452020072761e-2], [3.2046635844771767e-4, 1.6086791387574628e-3, 4.3869534978222104e-3, 7.6435695606029464e-3, 9.3234182541864684e-3, 8.0467563823148114e-3, 4.0268916889673961e-3], [-9.8892540889833572e-6, -8.9300957745107368e-5, -3.6353594199318818e-4, -8.6645977664667613e-4, -1.3395735064227587e-3, -1.3615083889214352e-3, -7.4599571888276726e-4], [3.0192789712575742e-7, 4.4544801411590973e-6, 2.5641908752035441e-5, 7.9947594129516981e-5, 1.5156006020302212e-4, 1.7751812761855259e-4, 1.0529531145763902e-4], [-9.0137382964286140e-9, -2.0458526576375370e-7, -1.5976266766549759e-6, -6.2975928657492757e-6, -1.4257487993340130e-5, -1.8894886919644583e-5, -1.2010583058187206e-5], [2.6257492408027828e-10, 8.7788071847709092e-9, 8.9954277079338631e-8, 4.3613069446211496e-7, 1.1537377828332850e-6, 1.7033142646985727e-6, 1.1501093849739232e-6], [-7.4759564498984453e-12, -3.5540976818455153e-10, -4.6477353627623130e-9, -2.7085089965844074e-8, -8.2194210268843659e-8, -1.3339223041931221e-7, -9.4947287821968682e-8], [2.0836407780349387e-13, 1.3671098803175307e-11, 2.2278243527616675e-10, 1.5299516940237948e-9, 5.2423531885547742e-9, 9.2453097939033078e-9, 6.8913603790068125e-9], [-5.6967824836688241e-15, -5.0226660980152097e-13, -9.9880407455512394e-12, -7.9447235451992811e-11, -3.0315593460730377e-10, -5.7520134657646510e-10, -4.4640955023324274e-10], [1.5294493209893261e-16, 1.7696072912764214e-14, 4.2147319269335087e-13, 3.8240089083982138e-12, 1.6053291483891184e-11, 3.2483999862011997e-11, 2.6117419942088832e-11], [-4.0393393118834760e-18, -5.9980966187058919e-16, -1.6823357219665585e-14, -1.7173475639167463e-13, -7.8465175758685209e-13, -1.6802830479173657e-12, -1.3934098691197875e-12], [1.0493291739812200e-19, 1.9608952223093946e-17, 6.3776196926756753e-16, 7.2348483701336794e-15, 3.5632123022180487e-14, 8.0201748659696335e-14, 6.8333952709902392e-14], [-2.6858093131058055e-21, -6.1902693418106794e-19, -2.3012106517227756e-17, -2.8680955257710038e-16, -1.5093333302921651e-15, -3.5488392356986677e-15, -3.0959097637421442e-15]],
        [[1.8501303827438609e-1, 1.3881811488271200e-1, 7.9961067146410006e-2, 3.7091371378218293e-2, 1.4855795270788996e-2, 5.4566254998395798e-3, 1.6325452171775737e-3], [-8.5600242781472357e-3, -1.5403246484835272e-2, -1.9144302702333617e-2, -1.5711778653625208e-2, -9.4756109486040782e-3, -4.5562890150541541e-3, -1.5725447958921676e-3], [2.2577403159096626e-4, 8.5926295369492463e-4, 1.7182505006916181e-3, 2.0845435343250052e-3, 1.7308763467133618e-3, 1.0536606252781948e-3, 4.1713195137520567e-4], [-6.2178951142265393e-6, -4.1983905345456137e-5, -1.2468116374521175e-4, -2.1029562633419330e-4, -2.2874406089182869e-4, -1.7056660478789735e-4, -7.6190354960638914e-5], [1.7093551568069637e-7, 1.8626161043592456e-6, 7.8224411898515499e-6, 1.7541195581034953e-5, 2.4083915259030195e-5, 2.1404189873855928e-5, 1.0619272296632785e-5], [-4.6249221380662098e-9, -7.6728339073331048e-8, -4.3863263038072792e-7, -1.2640839018542595e-6, -2.1279905678953497e-6, -2.2037007283085424e-6, -1.1977541679009887e-6], [1.2253139114586131e-10, 2.9738243087429506e-9, 2.2436720033098966e-8, 8.0859742903940274e-8, 1.6296953177916779e-7, 1.9295991550599697e-7, 1.1354754399132355e-7], [-3.1846068781828064e-12, -1.0939327233310264e-10, -1.0614580068931859e-9, -4.6755588405171821e-9, -1.1057508423863698e-8, -1.4729534793332049e-8, -9.2896932889205463e-9], [8.1127271551272007e-14, 3.8433970034709128e-12, 4.6904358693500747e-11, 2.4759124566633212e-10, 6.7528499556550450e-10, 9.9805678002434954e-10, 6.6878656402422562e-10], [-2.0354065087377674e-15, -1.2957596126075051e-13, -1.9502124412865977e-12, -1.2124674085214538e-11, -3.7564004909465029e-11, -6.0859601440904120e-11, -4.3004258643792271e-11], [5.0108606937799760e-17, 4.2073542275578436e-15, 7.6731273236835944e-14, 5.5324382600986993e-13, 1.9211028131665396e-12, 3.3759775428006368e-12, 2.4991469417602886e-12], [-1.2177034883842361e-18, -1.3194823163737556e-16, -2.8696675142848694e-15, -2.3663821912779666e-14, -9.1004366170667839e-14, -1.7185048783496172e-13, -1.3251819147348815e-13], [2.9349945862404306e-20, 4.0060768805115168e-18, 1.0238419834018396e-16, 9.5345297765745224e-16, 4.0175556824375142e-15, 8.0853923937220248e-15, 6.4623283635479005e-15], [-6.8207140228098441e-22, -1.1788186391233980e-19, -3.4916113193154645e-18, -3.6289708808835723e-17, -1.6590141089215982e-16, -3.5317387338929321e-16, -2.9127141192118098e-16]],
        [[1.6949166067378342e-1, 1.1358430316732131e-1, 5.1838108429762937e-2, 1.6781544031833546e-2, 4.1831001345006160e-3, 9.1533363441975490e-4, 1.8339295820374780e-4], [-7.0119200549076015e-3, -1.0133488545730487e-2, -9.7720648392713981e-3, -5.7645970558574259e-3, -2.2985969407448402e-3, -7.0796773133796530e-4, -1.7289134634745530e-4], [1.6496243849482299e-4, 4.9384329474047013e-4, 7.5657166449504801e-4, 6.6050286074954121e-4, 3.7331502414003191e-4, 1.5302650445461667e-4, 4.4898168278351963e-5], [-4.0889223088527894e-6, -2.1417777419640481e-5, -4.8162058252351385e-5, -5.8838284153336147e-5, -4.4705054697046549e-5, -2.3387493893613193e-5, -8.0475765239589279e-6], [1.0189388410016413e-7, 8.5067436759191268e-7, 2.6897136282827564e-6, 4.4055437405631172e-6, 4.3256175916335083e-6, 2.7939874453135727e-6, 1.1032540288171692e-6], [-2.5169171724864754e-9, -3.1593398577407404e-8, -1.3571873012314443e-7, -2.8849992517468334e-7, -3.5509093684816201e-7, -2.7570687166312077e-7, -1.2264120970650105e-7], [6.0945860610687212e-11, 1.1106781642663946e-9, 6.3016277098905873e-9, 1.6935331349466914e-8, 2.5488784742421203e-8, 2.3266804201396391e-8, 1.1478181695139202e-8], [-1.4583885939919713e-12, -3.7247355644708724e-11, -2.7257956761173383e-10, -9.0600928883846067e-10, -1.6328527278551189e-9, -1.7196129233601861e-9, -9.2842600065003510e-10], [3.4036441569536962e-14, 1.1985268623233589e-12, 1.1082488050403440e-11, 4.4700082391708729e-11, 9.4735437260239141e-11, 1.1325224593184874e-10, 6.6162690879167674e-11], [-7.8733316870077245e-16, -3.7153476916062126e-14, -4.2633229112196116e-13, -2.0519431955751217e-12, -5.0332002953881599e-12, -6.7343237124803096e-12, -4.2156848371720480e-12], [1.8195605755914422e-17, 1.1133297295857572e-15, 1.5597321938982295e-14, 8.8242658225452540e-14, 2.4699004580246637e-13, 3.6530474648036502e-13, 2.4297799225694325e-13], [-3.8910337669604432e-19, -3.2341999849178837e-17, -5.4490162610071007e-16, -3.5744850860163514e-15, -1.1272236982107321e-14, -1.8228302517770668e-14, -1.2788032915931234e-14], [9.1412902563209477e-21, 9.1200430817743544e-19, 1.8236400279498284e-17, 1.3699004976927022e-16, 4.8115530255224627e-16, 8.4245198889823781e-16, 6.1938561050639199e-16], [-2.0725795749000817e-22, -2.5011469120151600e-20, -5.8573201595741153e-19, -4.9796435790049598e-18, -1.9273583419114770e-17, -3.6215229738441078e-17, -2.7744414611028981e-17]],
        [[1.5664947063148174e-1, 9.6590883981168812e-2, 3.6924036023287697e-2, 8.9271632921869980e-3, 1.4487916904853121e-3, 1.8301971596463100e-4, 2.2073491810310180e-5], [-5.8641440286006517e-3, -7.0195152125439517e-3, -5.4630511912230366e-3, -2.4350001104129909e-3, -6.6311489638029444e-4, -1.2730851310133073e-4, -2.0165089353070401e-5], [1.2424020500019512e-4, 3.0152404648800327e-4, 3.6820282764965464e-4, 2.4041544144175023e-4, 9.4164292464672060e-5, 2.5196648656376735e-5, 5.0834631300148026e-6], [-2.7938149323156963e-6, -1.1703506099579632e-5, -2.0645263470311188e-5, -1.8826860467179014e-5, -1.0079191745420344e-5, -3.5775839547113358e-6, -8.8802450303342507e-7], [6.3415837542293420e-8, 4.1897804614823320e-7, 1.0290721381928547e-6, 1.2600974572626815e-6, 8.8594579211467238e-7, 4.0156733176936328e-7, 1.1907590037149325e-7], [-1.4430339351129975e-9, -1.4103953073759986e-8, -4.6798248607660949e-8, -7.4656354807247790e-8, -6.6878239439131853e-8, -3.7563394970075396e-8, -1.2985951321669706e-8], [3.1937778609834220e-11, 4.5188548404273603e-10, 1.9742189610676676e-9, 4.0034649522067847e-9, 4.4578776788325483e-9, 3.0265535659222933e-9, 1.1952862199001406e-9], [-7.0939160644966447e-13, -1.3866888739642626e-11, -7.8088021004141448e-11, -1.9723135936037519e-10, -2.6734592917747114e-10, -2.1483027833501686e-10, -9.5278611544440761e-11], [1.5599756066088153e-14, 4.0992690313052694e-13, 2.9197928729472569e-12, 9.0228287592079039e-12, 1.4620573190165176e-11, 1.3655313061055269e-11, 6.7027207765013491e-12], [-3.0502294078894876e-16, -1.1725669114505891e-14, -1.0384297688003817e-13, -3.8638460523306481e-13, -7.3652750176265633e-13, -7.8694604702210302e-13, -4.2220046601543812e-13], [7.6535407441332424e-18, 3.2449020497820936e-16, 3.5270402604525292e-15, 1.5583797377873349e-14, 3.4447463750206238e-14, 4.1518680094448994e-14, 2.4085630682313497e-14], [-1.4649975405175878e-19, -8.7525306976895353e-18, -1.1490558130430571e-16, -5.9491228509884343e-16, -1.5052047476910291e-15, -2.0211427335295444e-15, -1.2559900087301056e-15], [1.9553530469083196e-21, 2.3001194611709608e-19, 3.6004688950636172e-18, 2.1581612646569007e-17, 6.1763423168523182e-17, 9.1370393044437823e-17, 6.0328513868010862e-17], [-8.7692120634131311e-23, -5.8603570913431125e-21, -1.0862791289313141e-19, -7.4564408470286401e-19, -2.3870927889552356e-18, -3.8510672509225269e-18, -2.6820132582861445e-18]],
        [[1.4581982136859937e-1, 8.4587691670091137e-2, 2.8318394131437513e-2, 5.4490241268053579e-3, 6.1383430900953597e-4, 4.5071715103926731e-5, 2.9270412747292936e-6], [-4.9890290335451739e-3, -5.0733008510750725e-3, -3.2859496094073783e-3, -1.1595831465772778e-3, -2.2614616141378351e-4, -2.7129176970509980e-5, -2.5492428247952955e-6], [9.5968593219257432e-5, 1.9359814396657602e-4, 1.9504852728126788e-4, 9.9092902010308737e-5, 2.7755603029167391e-5, 4.8032313062951718e-6, 6.1586764298416181e-7], [-1.9742501690548630e-6, -6.7768187545368354e-6, -9.6832002657155041e-6, -6.8110240772601977e-6, -2.6261426476221461e-6, -6.2219380690157667e-7, -1.0380380954522747e-7], [4.0866551548476112e-8, 2.2018202187182480e-7, 4.3261638799073508e-7, 4.0694004221799876e-7, 2.0772720091577282e-7, 6.4655031233832900e-8, 1.3505998202780527e-8], [-8.6679808780691901e-10, -6.7517719846596639e-9, -1.7775944212718869e-8, -2.1765452354812562e-8, -1.4294389887723076e-8, -5.6620247722687568e-9, -1.4356666848063489e-9], [1.7766595148241275e-11, 1.9809275834231168e-10, 6.8273619360069459e-10, 1.0635390759896570e-9, 8.7761350245054963e-10, 4.3091239914044339e-10, 1.2927173593953126e-10], [-3.3832738740552307e-13, -5.5935991772007237e-12, -2.4744285957980797e-11, -4.8114060983598875e-11, -4.8894976328195128e-11, -2.9102713423755357e-11, -1.0110110687157660e-11], [8.7285740634829772e-15, 1.5178900396100509e-13, 8.5042647585994721e-13, 2.0340208549531039e-12, 2.5021692331588997e-12, 1.7708078690850749e-12, 6.9950030806470021e-13], [-1.1308807029978809e-16, -4.0391049303229715e-15, -2.7999946574534033e-14, -8.0979974288326993e-14, -1.1869742917324506e-13, -9.8191080004101303e-14, -4.3421041383742714e-14], [2.0756713339669346e-18, 1.0368109940152983e-16, 8.8305689804469509e-16, 3.0519662569977473e-15, 5.2566049669398714e-15, 5.0064242888118112e-15, 2.4451827821945494e-15], [-1.2443713121662101e-19, -2.5647518187348805e-18, -2.6759450473140565e-17, -1.0936648122356633e-16, -2.1855652465971691e-16, -2.3641421730616274e-16, -1.2604488697978410e-16], [-2.1649360384299321e-22, 6.3965656732880281e-20, 7.8557847266582935e-19, 3.7409443880459501e-18, 8.5708221225608371e-18, 1.0401405654820785e-17, 5.9919752446028165e-18], [6.9252039942390000e-24, -1.5260116306397311e-21, -2.2241677837489747e-20, -1.2235183689201187e-19, -3.1785521449880002e-19, -4.2789623841292157e-19, -2.6392205781820551e-19]],
        [[1.3654155472190335e-1, 7.5768782332898310e-2, 2.3007215557501659e-2, 3.7246562133926074e-3, 3.1293921854482776e-4, 1.4009437979004069e-5, 4.4552452061227209e-7], [-4.3061094488253806e-3, -3.7987274340436346e-3, -2.0948986386576887e-3, -6.0899001092742622e-4, -8.9736948493427428e-5, -6.9582615338442504e-6, -3.5988818119234346e-7], [7.5696208105002563e-5, 1.2966937828751122e-4, 1.1100065470746575e-4, 4.5559539956667417e-5, 9.4891651320105954e-6, 1.0774201010007343e-6, 8.1723733812593789e-8], [-1.4386030925102457e-6, -4.1207304728684056e-6, -4.9053589262380591e-6, -2.7490724718425798e-6, -7.8718877677325405e-7, -1.2497884219060615e-7, -1.3097417278645338e-8], [2.7175630296691241e-8, 1.2235817848774120e-7, 1.9750864260357600e-7, 1.4679576025987247e-7, 5.5675383740808634e-8, 1.1842618272423769e-8, 1.6348455143817826e-9], [-5.2597060907509606e-10, -3.4384782140970637e-9, -7.3636917371502762e-9, -7.0888917862922851e-9, -3.4700756924935436e-9, -9.5834466141736127e-10, -1.6785892494867061e-10], [1.1643769567876918e-11, 9.2265292648972130e-11, 2.5728015332476318e-10, 3.1511173236775384e-10, 1.9496034517907395e-10, 6.8110517080556659e-11, 1.4677465313691959e-11], [-1.1885562949399363e-13, -2.4388172664376532e-12, -8.6170024509267579e-12, -1.3089975114569109e-11, -1.0029151556367237e-11, -4.3328384135250154e-12, -1.1194424325429422e-12], [4.8370711970335362e-15, 6.0357236232049142e-14, 2.7160962597856134e-13, 5.1017697502365768e-13, 4.7728915258616806e-13, 2.5011011767838621e-13, 7.5791300311244346e-14], [-1.3761729819463139e-16, -1.4691795288242398e-15, -8.2469207822362895e-15, -1.8834256284244339e-14, -2.1192180224046312e-14, -1.3236993181821010e-14, -4.6167279781604535e-15], [-3.0437779947769117e-18, 3.7312117326570445e-17, 2.4486900935387306e-16, 6.6245834901249474e-16, 8.8349918013778488e-16, 6.4753272102927002e-16, 2.5571437787477231e-16], [-8.4858683859893398e-20, -8.0793824401666845e-19, -6.8384404344980637e-18, -2.2205502773873424e-17, -3.4752263277115022e-17, -2.9469749940838790e-17, -1.2990341507841129e-17], [2.7418570861515212e-21, 1.8035843130048818e-20, 1.8702479219880497e-19, 7.1396332725865280e-19, 1.2952792480341623e-18, 1.2544822851555752e-18, 6.0957410881807631e-19], [1.1006105758887074e-22, -4.7419340696565823e-22, -5.0537858542480692e-21, -2.2053567808749505e-20, -4.5849164817551407e-20, -5.0106990436980851e-20, -2.6540532459969397e-20]],
        [[1.2848498860158519e-1, 6.9072572580568868e-2, 1.9550724254466920e-2, 2.7891403181344471e-3, 1.8748962423707745e-4, 5.5455308675774706e-6, 8.2468478110139289e-8], [-3.7629063619529514e-3, -2.9304320803339894e-3, -1.3979873722946581e-3, -3.4515335180498306e-4, -4.0461074144952696e-5, -2.1503704413085193e-6, -5.8966198213893479e-8], [6.0741393376735681e-5, 9.0032159851749840e-5, 6.7135766262403925e-5, 2.3040343276462593e-5, 3.7190860874087771e-6, 2.8670183294012932e-7, 1.2242439303359673e-8], [-1.0736495989364447e-6, -2.6126699353674471e-6, -2.6552305264961908e-6, -1.2216247893931615e-6, -2.6890377052890978e-7, -2.9270997337183978e-8, -1.8276783190565373e-9], [1.9248646917934347e-8, 7.1154273468427424e-8, 9.6556837832681526e-8, 5.8372758010625016e-8, 1.6943719566375635e-8, 2.4946930694062199e-9, 2.1545849695736404e-10], [-2.7450686859947655e-10, -1.8653610097500359e-9, -3.3210070421901478e-9, -2.5614884824082908e-9, -9.5395417934274673e-10, -1.8430561990117708e-10, -2.1105262077286879e-11], [9.5437205609219157e-12, 4.4779491187941054e-11, 1.0376048247857984e-10, 1.0299369885495685e-10, 4.8775511544933155e-11, 1.2096323392962737e-11, 1.7742348679452771e-12], [-7.0846840240358806e-14, -1.1229957187975865e-12, -3.2473156839905503e-12, -3.9395581966282332e-12, -2.3075324096221138e-12, -7.1759297150997302e-13, -1.3088945709370775e-13], [-2.6773684459496931e-15, 2.7532045680190468e-14, 9.7037075043238154e-14, 1.4220247206473811e-13, 1.0169582598088016e-13, 3.8937697934910229e-14, 8.6131243673401784e-15], [-2.7041332443588794e-16, -5.0589000053209594e-16, -2.5516018846154654e-15, -4.8181447722578631e-15, -4.2027115010242262e-15, -1.9503771492444712e-15, -5.1193173858060496e-16], [-1.3272380567486247e-18, 1.3870844875451920e-17, 7.3780851342351471e-17, 1.5877414581825276e-16, 1.6422579639755498e-16, 9.0839249024347852e-17, 2.7756320564621276e-17], [2.2884075973857270e-19, -3.8180931670975980e-19, -2.0416292213514238e-18, -4.9969547470329228e-18, -6.0824187972368628e-18, -3.9563303209409076e-18, -1.3839173919652245e-18], [1.0698578404401687e-20, 2.2597145611495636e-21, 4.3999814043729585e-20, 1.4873701069314431e-19, 2.1428281058973616e-19, 1.6189997951134273e-19, 6.3879946982289958e-20], [1.2682376389805402e-22, -1.6268792233106423e-22, -1.2986116454949168e-21, -4.3822177183425561e-21, -7.2098898225039941e-21, -6.2420024191309539e-21, -2.7411104767200159e-21]],
        [[1.2140777725503995e-1, 6.3844687302132907e-2, 1.7206621593290789e-2, 2.2458304702174748e-3, 1.2860593361482481e-4, 2.7690666139640597e-6, 1.9955228792959474e-8], [-3.3236156134631717e-3, -2.3187314266996498e-3, -9.6638881105768685e-4, -2.0676674482893434e-4, -2.0131145749803891e-5, -7.8678214593588311e-7, -1.1688168330516884e-8], [4.9562094993662500e-5, 6.4443635167669393e-5, 4.2717576586588237e-5, 1.2645140542864891e-5, 1.6479884801114796e-6, 9.0407082726030122e-8, 2.1444921662565692e-9], [-7.9810975225874007e-7, -1.7233508726247084e-6, -1.5318978477991066e-6, -5.9314211053262841e-7, -1.0361507910061392e-7, -8.0075049537635760e-9, -2.9031827717423195e-10], [1.5800859076021349e-8, 4.2501675079322901e-8, 4.9189379607277811e-8, 2.5034891769343835e-8, 5.7758343126412368e-9, 6.0658049631037291e-10, 3.1675100703978813e-11], [-8.7643783687351993e-11, -1.0822146711014660e-9, -1.6392634714415100e-9, -1.0243050735415195e-9, -2.9567735363623106e-10, -4.0562972448256048e-11, -2.9130309283221473e-12], [4.9841491026085434e-12, 2.3510934815224290e-11, 4.5690148503466391e-11, 3.7065465542974941e-11, 1.3687921876227841e-11, 2.4336084307285103e-12, 2.3238142336291462e-13], [-2.9351143196910894e-13, -4.5803206465838701e-13, -1.1886900716473728e-12, -1.2696784359334479e-12, -5.9138996709202236e-13, -1.3338797273849585e-13, -1.6405361066056917e-14], [-9.5417007840680238e-15, 1.5418099879701303e-14, 4.0935805267612331e-14, 4.4533991486395565e-14, 2.4241902581907239e-14, 6.7494471250514084e-15, 1.0399606899235147e-15], [2.6684001769208947e-17, -2.7014908143699751e-16, -9.5298544833287128e-16, -1.3722192678228845e-15, -9.2658541154927494e-16, -3.1727422914756241e-16, -5.9863381854623459e-17], [1.8888133268169051e-17, -1.5896250570229126e-18, 1.4242406438702600e-17, 3.9463350590255702e-17, 3.3640333232398192e-17, 1.3961335827276981e-17, 3.1572534078707563e-18], [5.4519657018120099e-19, -2.9052361857668687e-19, -8.6748414264848377e-19, -1.2973816671411276e-18, -1.1801232349840804e-18, -5.7799820978857184e-19, -1.5368146696740726e-19], [-9.0423178008597660e-21, 6.4341570565344328e-21, 1.8309323103376539e-20, 3.5113295407312979e-20, 3.8949150919688653e-20, 2.2577253786505625e-20, 6.9460868180988581e-21], [-1.1609465435389198e-21, 3.8278538791575306e-22, 2.5857779813999385e-22, -8.0537214632975311e-22, -1.2305873402634917e-21, -8.3499421779716907e-22, -2.9260842073388952e-22]],
        [[1.1512967732714531e-1, 5.9664476572057814e-2, 1.5565389495237535e-2, 1.9148662201017685e-3, 9.8462010955059426e-5, 1.7002763262269799e-6, 6.7563544651057530e-9], [-2.9612374566695803e-3, -1.8758065123571375e-3, -6.8695107115274660e-4, -1.2855987543011628e-4, -1.0705885109276785e-5, -3.2883088614737673e-7, -2.8796474920918948e-9], [4.1455881915341683e-5, 4.7218866789883767e-5, 2.8142722789378865e-5, 7.3841599201759159e-6, 8.0946251313979136e-7, 3.3410436055946342e-8, 4.5432491441948483e-10], [-5.5616465158488230e-7, -1.1893009499220475e-6, -9.5660308036893420e-7, -3.1782572842714515e-7, -4.5034116968138505e-8, -2.5548085379626479e-9, -5.4069574476390909e-11], [1.4425881974089265e-8, 2.5708014034870212e-8, 2.5313589691763802e-8, 1.1235594388548679e-8, 2.1555381956852885e-9, 1.6910345468768340e-10, 5.3291187045878838e-12], [-9.4168908885495539e-11, -6.2599624373360933e-10, -8.2336568487308656e-10, -4.3735041403650243e-10, -1.0177056166170437e-10, -1.0222226761169427e-11, -4.5176915710743616e-13], [-6.1334245346660147e-12, 1.5939558171587768e-11, 2.6028805116017783e-11, 1.5690337519406813e-11, 4.3674517662210397e-12, 5.5807470119104677e-13, 3.3659519611890656e-14], [-4.0838839302014180e-13, -1.4887156660937494e-13, -3.7385875299025052e-13, -4.1685717628609942e-13, -1.6565398495126032e-13, -2.7895793195861412e-14, -2.2435928614183145e-15], [7.8298202738725499e-15, 2.8734435070674962e-15, 1.0598866340819148e-14, 1.3519666086720456e-14, 6.3199865493286533e-15, 1.3100717797304653e-15, 1.3551897383134684e-16], [8.8899508862094495e-16, -4.2077650070060022e-16, -8.1005112478778910e-16, -5.4038416696758445e-16, -2.3554752027262965e-16, -5.7600251146311461e-17, -7.4841240324791332e-18], [9.4475577617333455e-18, -1.4614892476765529e-19, 3.2185020730572060e-18, 1.0253846729528594e-17, 7.4876869627740144e-18, 2.3642542959065481e-18, 3.8083416969086585e-19], [-1.4012326059884080e-18, 4.7025675343733350e-19, 5.1778900954603143e-19, -1.6069324246549623e-19, -2.3900009639234210e-19, -9.2503865548064775e-20, -1.7976216327454742e-20], [-5.3977911426997829e-20, 1.7770156421325549e-20, 3.2591897781809176e-20, 1.6689387090299813e-20, 8.5191340785828203e-21, 3.4521378726565900e-21, 7.9096673368892164e-22], [1.0659966199673359e-21, -5.0608656642526319e-22, -6.0119334315845842e-22, -2.9513743693666870e-22, -2.3092663367915236e-22, -1.2063473420706830e-22, -3.2539181397254277e-23]],
        [[1.0952034812956420e-1, 5.6249810601782286e-2, 1.4384442531474112e-2, 1.7065347972635625e-3, 8.2145885581742761e-5, 1.2373800253281062e-6, 3.2787652627100143e-9], [-2.6525734794154610e-3, -1.5489727938312551e-3, -5.0188795090220439e-4, -8.2234842061492770e-5, -5.9296617414525653e-6, -1.5003334999359105e-7, -8.7121336852974352e-10], [3.6070160203000966e-5, 3.5065599003270269e-5, 1.8651335863344499e-5, 4.4173181976106214e-6, 4.2376077244678864e-7, 1.4033800015935829e-8, 1.1862711336356910e-10], [-3.5141781289892314e-7, -8.5874760477990285e-7, -6.5257707452286310e-7, -1.9086466773163347e-7, -2.2382846815621181e-8, -9.5671851974216160e-10, -1.2131816389243209e-11], [1.0414046766934736e-8, 1.6673908327584879e-8, 1.4336977484719937e-8, 5.4950625758015115e-9, 8.8368411959869136e-10, 5.3550380454483107e-11, 1.0473969580487863e-12], [-3.2171210016053125e-10, -2.9592178728048359e-10, -3.1052582784226582e-10, -1.6722901711211188e-10, -3.5925598900043570e-11, -2.8816791378712009e-12, -8.0371297057061518e-14], [-9.5860287613740629e-12, 1.1054893418525070e-11, 1.6460243773454764e-11, 7.6912589876122067e-12, 1.6075574901603715e-12, 1.4739839758989113e-13, 5.5158324403711144e-15], [2.7707865613632213e-13, -2.5132738945140879e-13, -4.1297939915140758e-13, -2.1915508204159859e-13, -5.6152730987810302e-14, -6.6535809676774299e-15, -3.4131368620998048e-16], [2.7926440915524627e-14, -6.3150569354666545e-15, -8.2175241510588119e-15, 1.3095359651596478e-15, 1.5274869893294440e-15, 2.7804167879536802e-16, 1.9366911427500454e-17], [-2.7454447101997283e-16, 6.4424416484411757e-17, -7.7350215495612496e-18, -1.1921684028938720e-16, -6.1200301524520250e-17, -1.1701872374850821e-17, -1.0171376876896075e-18], [-5.9716960162873501e-17, 2.0874896165808414e-17, 3.4043610338665141e-17, 1.1959907143193096e-17, 2.6038122370337445e-18, 4.6188376712399164e-19, 4.9460751433757764e-20], [-2.3353483352982770e-19, -2.3971442522681958e-20, 8.0275657279624904e-20, -1.6590251533365113e-20, -4.6109363580740951e-20, -1.5854106171732827e-20, -2.2386421142341552e-21], [1.1733347613215090e-19, -3.9651852573701750e-20, -5.9051024846874180e-20, -1.3272075157534842e-20, 4.9181270051921087e-22, 5.5038008612721891e-22, 9.5328890985827522e-23], [2.0756157572896759e-21, -4.7505155456660814e-22, -1.1764971386122171e-21, -4.6609351747813013e-22, -9.6904874110950263e-23, -2.0883965750857932e-23, -3.8191516479114132e-24]],
        [[1.0449204642833279e-1, 5.3402713177386137e-2, 1.3507595730164025e-2, 1.5710731730527287e-3, 7.2966928383006774e-5, 1.0212528988600444e-6, 2.1668661264991885e-9], [-2.3785982545951311e-3, -1.3055020177927850e-3, -3.8045528499032441e-4, -5.4762265157866769e-5, -3.4168993184453849e-6, -7.2506245982318045e-8, -3.0725954169252868e-10], [3.2611087750717819e-5, 2.6205349817654895e-5, 1.2049482539283868e-5, 2.5710406126728324e-6, 2.2181416256329402e-7, 6.2764107401078897e-9, 3.7271648108037615e-11], [-2.4458275755610511e-7, -6.2762094464664445e-7, -4.5578765797966908e-7, -1.2169227269322033e-7, -1.2350734050358836e-8, -4.1798247184317682e-10, -3.3587511557156042e-12], [2.7345796880275063e-9, 1.2748740703361418e-8, 1.1017591806163961e-8, 3.5182146071031544e-9, 4.4583986361657790e-10, 2.0121710288663133e-11, 2.4580283335450521e-13], [-3.8192755812302400e-10, -1.3064301127469195e-10, -7.5604001112055556e-11, -5.2472972011160098e-11, -1.2103727305920016e-11, -8.6316234582943960e-13, -1.6440158187200430e-14], [6.2912437744702732e-12, 2.5135244182375106e-12, 2.8337580185347146e-12, 2.0842382669792818e-12, 5.0849337857124675e-13, 4.1590125652493025e-14, 1.0364639957946175e-15], [6.3125112786871914e-13, -2.8926850750937315e-13, -4.6163094563715478e-13, -1.6762203744380974e-13, -2.6474104319988108e-14, -1.9537642724243114e-15, -5.9570475560562382e-17], [-1.2641322630650344e-14, 6.0723460768689046e-15, 9.2989139388198675e-15, 3.5580531912723880e-15, 6.9048389987721425e-16, 7.0520918007401133e-17, 3.0922056558144865e-18], [-1.3300491154526845e-15, 3.9575266169137393e-16, 6.3509576490949397e-16, 1.4345893325691113e-16, -5.9825475157093619e-19, -2.1722094496894329e-18, -1.5038542412308145e-19], [3.0955832130286056e-17, -1.0950278119928571e-17, -1.4445934766691073e-17, -2.3816537573002942e-18, 3.1245078511781381e-19, 9.2992810789125883e-20, 7.0349468932928983e-21], [2.6827649187652451e-18, -8.3140066208856306e-19, -1.4367269335992985e-18, -4.3825157320942808e-19, -5.3429781921338507e-20, -4.2732170364884650e-21, -3.0781040943385526e-22], [-7.1562093738737966e-20, 2.6810262440124361e-20, 3.6671766420625793e-20, 8.9468782218227636e-21, 8.7797533663530876e-22, 1.0535410542353380e-22, 1.2231443756057425e-23], [-5.4028693366315771e-21, 1.5843856131902340e-21, 2.8563196405138571e-21, 8.4609767774503205e-22, 7.4723331274557637e-23, -7.7973196106079734e-25, -4.6017917326287743e-25]],
        [[9.9986635651958317e-2, 5.0979825502528295e-2, 1.2827804441947327e-2, 1.4781225343098970e-3, 6.7513847241558934e-5, 9.1374202159207563e-7, 1.7578059352310947e-9], [-2.1292080658750648e-3, -1.1227062526519600e-3, -3.0304995333133728e-4, -3.9147123106843410e-5, -2.1291118087494099e-6, -3.7920993883517859e-8, -1.2183056564051891e-10], [2.9726557388638463e-5, 1.9815884564012207e-5, 7.5897136960574983e-6, 1.4189593859040280e-6, 1.0998456515335169e-7, 2.7568891795857465e-9, 1.2916630180172105e-11], [-2.4899442236761219e-7, -4.4349675639601492e-7, -2.9148505477654238e-7, -7.2394341253809650e-8, -6.6981097794344182e-9, -1.9465448088561315e-10, -1.1198928673016085e-12], [-2.3412907679828771e-9, 1.0237240810313843e-8, 9.3799787942935066e-9, 2.6707500114823743e-9, 2.7858552504305632e-10, 9.4890284158398312e-12, 7.2610054053684528e-14], [-9.6079577495331578e-11, -1.3664765347794952e-10, -1.1419653850421049e-10, -4.2513895142227595e-11, -6.3254068501002437e-12, -3.2056023362370175e-13, -3.9650947789742288e-15], [1.3725449949444584e-11, -1.5960203627666306e-12, -3.7819582747390824e-12, -5.3050333253668305e-13, 6.9490118185198283e-14, 1.0133920886364537e-14, 2.1286855037163101e-16], [-1.5699440305639630e-13, 6.8319149866240497e-15, 1.2034475334209053e-14, -1.5101660295278266e-14, -5.7294488717460848e-15, -5.1236776810931777e-16, -1.1716621771594667e-17], [-2.3430003206947711e-14, 8.2385938615271066e-15, 1.3627068241157872e-14, 4.2745008271768992e-15, 5.1420521627339693e-16, 2.6912015047967990e-17, 5.9613869889449807e-19], [7.3603034113580944e-16, -2.6189550864050892e-16, -4.0737980033136148e-16, -1.1906816386130440e-16, -1.3646308332330710e-17, -8.1133150724806887e-19, -2.5934601267903499e-20], [3.3853327588655595e-17, -9.8366616292110316e-18, -1.7391818211229721e-17, -4.8855258986753966e-18, -3.6659730984246360e-19, 6.3784867932506887e-21, 1.0186501420374992e-21], [-2.1110770520160153e-18, 6.8323805674241049e-19, 1.0886681735763345e-18, 2.8922254707908664e-19, 2.1433127228854460e-20, -9.3197160513686473e-23, -4.2442905419171193e-23], [-2.9030661525301828e-20, 6.7211174075278994e-21, 1.6165507964594547e-20, 5.9016535891842720e-21, 7.9099500493381179e-22, 4.6576378647876327e-23, 1.8983233159183064e-24], [4.7654949368130999e-21, -1.4788766379978091e-21, -2.5060809554293386e-21, -7.2129340679618489e-22, -6.9200949017792793e-23, -2.4472300334685099e-24, -7.2942539426976053e-26]],
        [[9.5956090165323620e-2, 4.8877908546460234e-2, 1.2273014246202893e-2, 1.4088964510279116e-3, 6.3928395959496848e-5, 8.5410184230927090e-7, 1.5857635484957002e-9], [-1.9040262687147767e-3, -9.8290165491248605e-4, -2.5397431825532866e-4, -3.0612835111563544e-5, -1.5041522639354712e-6, -2.3047926343591020e-8, -5.7153736224840914e-11], [2.6501472340186251e-5, 1.5380961894994417e-5, 4.9030349297454138e-6, 7.7646807472259478e-7, 5.2387779253060309e-8, 1.1533887145944892e-9, 4.4996505367500523e-12], [-2.8657932554593455e-7, -3.0317154286438952e-7, -1.6380947012429099e-7, -3.7080913821258200e-8, -3.1896879073728791e-9, -8.4358554911106051e-11, -3.9657336120477709e-13], [-1.6393255400875263e-9, 7.2484581909159217e-9, 6.4028919028613181e-9, 1.7191227858065054e-9, 1.6323912904372013e-10, 4.7435215404351316e-12, 2.6103836346542085e-14], [1.2519898939809822e-10, -1.5287272905514032e-10, -1.6766942948661946e-10, -4.9536576667589206e-11, -5.2276228686062845e-12, -1.7714309346842340e-13, -1.2864458329895337e-15], [3.6423629189612265e-12, 6.5485329881388370e-13, 3.6114964426436153e-14, 1.9588766959227559e-13, 5.7273217337573937e-14, 3.8763034639604520e-15, 5.2360127973155397e-17], [-3.9687866295220730e-13, 9.8869634695907979e-14, 1.7026225786180122e-13, 4.0450059232025231e-14, 2.0691067422448035e-15, -5.5133342168204030e-17, -2.2063566919213277e-18], [6.6663302043302323e-15, -1.7683725538692092e-15, -2.7645502324567429e-15, -5.4220975547001153e-16, 4.1538208372041770e-18, 4.2703935155658643e-18, 1.1268068764113669e-19], [5.0846750914363101e-16, -1.6422250313820140e-16, -2.7999804799654358e-16, -8.4914322018999506e-17, -9.1792310467312859e-18, -3.7695536126043560e-19, -5.7522470924630582e-21], [-2.8050930970508263e-17, 9.0560275503302879e-18, 1.4889501849350618e-17, 4.2526806362726377e-18, 4.1243450677066696e-19, 1.4639528191024092e-20, 2.3186846789496748e-22], [-5.7666950874979830e-20, 3.3343313882810399e-23, 3.1203554733488191e-20, 1.4076690783511322e-20, 1.4378850094335225e-21, -5.1504036554293054e-23, -6.6415062606668277e-24], [5.2984960038599969e-20, -1.6056040115678651e-20, -2.7864994972066291e-20, -8.0872020546062762e-21, -7.4924652977805464e-22, -1.7228292135692394e-23, 1.5744386103443752e-25], [-1.5398421447676444e-21, 4.9942362359178670e-22, 8.0028558190741193e-22, 2.1756806034676043e-22, 1.8198396536255675e-23, 3.2757151504387622e-25, -7.1608913041398845e-27]],
        [[9.2348979449187780e-2, 4.7024876903271140e-2, 1.1799130970485861e-2, 1.3527559584880367e-3, 6.1244449226027519e-5, 8.1478024027682545e-7, 1.4963359219795026e-9], [-1.7060115019341929e-3, -8.7265739736208211e-4, -2.2111883686408124e-4, -2.5785331918032360e-5, -1.2011261420674287e-6, -1.6818127000771425e-8, -3.4684986157373631e-11], [2.2994207760348084e-5, 1.2342814760773076e-5, 3.4453034252699283e-6, 4.6557698016201373e-7, 2.6622295211852625e-8, 4.9488308475470361e-10, 1.5748401105255226e-12], [-2.9122760416315545e-7, -2.1002246976200827e-7, -8.6782906517896573e-8, -1.6920648869717453e-8, -1.3224616482656826e-9, -3.2120738082413956e-11, -1.3206074571147886e-13], [1.0083728432990290e-9, 4.5247073368924275e-9, 3.3673125452717278e-9, 8.4910233325090208e-10, 7.6303660486840345e-11, 2.0462416164641633e-12, 9.4243590596822734e-15], [1.1305925340872556e-10, -1.1348530052704786e-10, -1.2506656896349924e-10, -3.4924548056437610e-11, -3.3405648564443420e-12, -9.6020059418553212e-14, -5.0324310194185138e-16], [-3.1396587094984562e-12, 2.1913934113443615e-12, 2.7977554679402325e-12, 8.4158780879443695e-13, 8.8409095333480160e-14, 2.9297425853325567e-15, 1.9889844071130986e-17], [-8.0256998022205347e-14, 8.0823516518790772e-15, 2.1314473436179759e-14, 3.2797065727242998e-15, -2.4367567189725203e-16, -3.7889021996633389e-17, -5.9502548790833531e-19], [8.6702150234933950e-15, -2.4995466722869175e-15, -4.1699432629919191e-15, -1.0884572048761673e-15, -8.0207180673702046e-17, -8.4309630035344260e-19, 1.6871782868306463e-20], [-2.2687425244715295e-16, 6.8647909558473334e-17, 1.1223701214158336e-16, 2.9313084953350602e-17, 2.1201039967475552e-18, 1.3867366252878068e-20, -7.7732265450889163e-22], [-4.7760836404824913e-18, 1.4973973249933211e-18, 2.6295430331786362e-18, 8.1225307818479380e-19, 8.9188043773397232e-20, 3.5925936719001199e-21, 4.7381612647997102e-23], [5.5217899038288802e-19, -1.7200383566978220e-19, -2.9193236734179548e-19, -8.4431075802845111e-20, -8.0868283132117753e-21, -2.4831402824036934e-22, -2.2684098121450261e-24], [-1.4200195074349541e-20, 4.5111875175724853e-21, 7.4588047938371493e-21, 2.1084765058999609e-21, 1.9601258646641582e-22, 5.9892229349275938e-24, 6.8752899406259428e-26], [-3.1544055498033137e-22, 8.9260726818730261e-23, 1.6793297542705146e-22, 5.1563944549988903e-23, 5.1234570125992162e-24, 1.2957158064692823e-25, -7.7507943657272508e-28]],
        [[8.9110132442036472e-2, 4.5371090400202108e-2, 1.1381694171523133e-2, 1.3043994005169863e-3, 5.9016679014937793e-5, 7.8419356154528116e-7, 1.4359427326183845e-9], [-1.5356190927023737e-3, -7.8291934074538946e-4, -1.9697239648543771e-4, -2.2687992554931794e-5, -1.0352291524605989e-6, -1.3967382837861008e-8, -2.6482689770508813e-11], [1.9656685481581238e-5, 1.0191159357317358e-5, 2.6564565869451990e-6, 3.2449194807526273e-7, 1.6229914001158579e-8, 2.5378359157728359e-10, 6.3336407831337355e-13], [-2.6140009643536850e-7, -1.5298200215460477e-7, -4.9285820508218086e-8, -7.8516001460321116e-9, -5.2731557713060047e-10, -1.1327142830877491e-11, -4.0655067279043850e-14], [2.4623267605327479e-9, 2.7627845913281710e-9, 1.5246977554136729e-9, 3.4416689739205271e-10, 2.9001985375126016e-11, 7.3144280661995755e-13, 3.0240300646740768e-15], [3.4169352615174446e-11, -6.4810461892822719e-11, -6.1876582399798587e-11, -1.6505740634303637e-11, -1.5094425041987778e-12, -4.0462927686611366e-14, -1.8144803769027590e-16], [-2.7805311644841431e-12, 1.6857144657235358e-12, 2.1659214993347725e-12, 6.1642927586244623e-13, 5.8884038063520004e-14, 1.6664553369272212e-15, 8.3133793374936702e-18], [6.4498934056808768e-14, -3.1633299885152119e-14, -4.5637377060978045e-14, -1.3759751414668885e-14, -1.4181107795841632e-15, -4.5183890620261048e-17, -2.8131417729460392e-19], [1.0094093382990308e-15, -1.7570596735414820e-16, -3.2670385614247492e-16, -5.6334010005786485e-17, 1.5555719524479208e-18, 4.1401878925045314e-19, 6.4875595938922155e-21], [-1.3768454375697535e-16, 4.1508958130084059e-17, 6.8791715775035521e-17, 1.8500529372570801e-17, 1.4849343632548686e-18, 2.5695059716406196e-20, -8.7646102109837352e-23], [4.8570469658051284e-18, -1.4952770578546347e-18, -2.4938348850436486e-18, -6.8791170767030639e-19, -5.8074378196368127e-20, -1.1535039847949670e-21, 1.9132254150143631e-24], [-2.8163639143546969e-20, 8.5077735453689945e-21, 1.3900959024454851e-20, 3.5484365472007397e-21, 2.2129574957302793e-22, -3.2319994780972809e-24, -2.2953468693208273e-25], [-5.3621912605699002e-21, 1.6568466060761777e-21, 2.8347534648062646e-21, 8.2259887324340102e-22, 7.8526472752049183e-23, 2.3167508190349261e-24, 1.7055074698670893e-26], [2.7357750376539437e-22, -8.4174547710039598e-23, -1.4417954298835611e-22, -4.1712811829258689e-23, -3.9422532729552690e-24, -1.1252164913296800e-25, -7.4430666492585562e-28]],
        [[8.6186708624366077e-2, 4.3881441277050944e-2, 1.1007369150919765e-2, 1.2613734283010487e-3, 5.7060352558406120e-5, 7.5796619855941244e-7, 1.3869353794322984e-9], [-1.3902115304917576e-3, -7.0806744690506151e-4, -1.7774960910895501e-4, -2.0395829944740030e-5, -9.2467280822845062e-7, -1.2331247372793242e-8, -2.2761757190312296e-11], [1.6768807250951535e-5, 8.5841287561651540e-6, 2.1785209007160785e-6, 2.5466970035307205e-7, 1.1903248371417826e-8, 1.6731727822562687e-10, 3.4479274601381006e-13], [-2.1952825805565813e-7, -1.1724763105754244e-7, -3.2399273829308796e-8, -4.3105430637304424e-9, -2.4092414102840708e-10, -4.3203411595189309e-12, -1.2752344710188730e-14], [2.6286143732045774e-9, 1.8005871595931528e-9, 7.0476699357179561e-10, 1.3170621016521644e-10, 9.9134049040066646e-12, 2.2991543829614986e-13, 8.6206410319738680e-16], [-1.0598763069795826e-11, -3.4613427463190910e-11, -2.4749870457505192e-11, -6.0964555823185748e-12, -5.3239787486084340e-13, -1.3597740112070422e-14, -5.5668493159815456e-17], [-1.0288826950757570e-12, 8.7240003262656282e-13, 9.9145401829416048e-13, 2.7220845185231768e-13, 2.5040984098758615e-14, 6.6726345860512655e-16, 2.9104105966815469e-18], [4.9763876833128525e-14, -2.3289767519776681e-14, -3.3039763928930368e-14, -9.4800056079814868e-15, -9.0084954662179916e-16, -2.5067906646274497e-17, -1.1930902522416874e-19], [-1.1363066533418952e-15, 4.5237716459237524e-16, 7.0695432848233047e-16, 2.1172527046485881e-16, 2.1293094222203564e-17, 6.4862756184618744e-19, 3.6780234290838972e-21], [-4.6599465018289112e-18, 5.0665282482892464e-19, 6.1195026531899357e-19, -2.6354395554231788e-19, -9.9681638358649280e-20, -6.6131598107318326e-21, -7.4671286137279030e-23], [1.5786874480755276e-18, -4.8629189307533584e-19, -7.9881245759363397e-19, -2.1572756927069587e-19, -1.7581370251707179e-20, -3.2838473965493968e-22, 4.0841963211184047e-25], [-6.8831108211525323e-20, 2.1314097057067446e-20, 3.5714196608368921e-20, 9.9875813779124964e-21, 8.7239939187258445e-22, 1.9639842546386874e-23, 2.8237174644313355e-26], [1.3577363269873161e-21, -4.1514268700097258e-22, -7.0850486140244554e-22, -2.0139167644436577e-22, -1.8006956540993059e-23, -4.1667393943489969e-25, -3.8306007688104896e-28], [1.6515323417263290e-23, -5.2807914461787338e-24, -8.7348817080866089e-24, -2.4819399975924910e-24, -2.3207896137345742e-25, -6.9416763905513200e-27, -6.2858317513024926e-29]],
        [[8.2804394198960181e-2, 4.2159071584886890e-2, 1.0575169654624399e-2, 1.2118156095942540e-3, 5.4816218615930631e-5, 7.2810172453105198e-7, 1.3320691803614859e-9], [-1.9727184675795402e-3, -1.0044515204960984e-3, -2.5198913829196516e-4, -2.8882056179043555e-5, -1.3069562808654176e-6, -1.7371002248916403e-8, -3.1824575574192304e-11], [3.5226841863065518e-5, 1.7953856119920807e-5, 4.5135346961042895e-6, 5.1918198736873343e-7, 2.3633352204292898e-8, 3.1739128512146018e-10, 5.9458339813417263e-13], [-6.9531386004644907e-7, -3.5769616851230695e-7, -9.1724578698942171e-8, -1.0907123265797601e-8, -5.2335010147044107e-10, -7.6621333588859473e-12, -1.6920223256325669e-14], [1.3929675497183658e-8, 7.6322209889089211e-9, 2.2084052095371482e-9, 3.1156719962036293e-10, 1.8550338719054840e-11, 3.5343311393732050e-13, 1.0949351589659868e-15], [-2.3819083571496193e-10, -1.8241643333313444e-10, -7.9132522107604177e-11, -1.5746377335352858e-11, -1.2256233699799215e-12, -2.8800080188698556e-14, -1.0678363046063287e-16], [1.2775065089241752e-13, 5.5504543296390688e-12, 4.3973242601349628e-12, 1.1092711310190467e-12, 9.7237670730018781e-14, 2.4618624866069628e-15, 9.7614947187447088e-18], [3.2964263307273954e-13, -2.2466612799325097e-13, -2.7242254295834818e-13, -7.5138248173670798e-14, -6.8650155371074138e-15, -1.7963606607052934e-16, -7.4708817796662290e-19], [-2.3656903393232499e-14, 9.9446491502554186e-15, 1.4688574866921417e-14, 4.1957244195348513e-15, 3.9258349022587752e-16, 1.0589252322467383e-17, 4.6750933439253890e-20], [1.0296875875470548e-15, -3.6870787294001824e-16, -5.9476991700225496e-16, -1.7435104784157598e-16, -1.6820929435471368e-17, -4.7654868396959407e-19, -2.3266026028092907e-21], [-2.1175151857114194e-17, 7.1779340015339052e-18, 1.2491403097058269e-17, 3.9151993481014094e-18, 4.1588018976573388e-19, 1.3621335027427070e-20, 8.5045985267264630e-23], [-9.3309189089528376e-19, 2.9464624995909434e-19, 4.5414025683486420e-19, 1.1228462352517270e-19, 7.4233804170216141e-21, 4.0226609380716132e-23, -1.6059834899623148e-24], [1.2177663621217854e-19, -3.8221782520068076e-20, -6.3107015474904618e-20, -1.7444755445732271e-20, -1.4964295776599637e-21, -3.2699994536476876e-23, -4.9336743479009625e-26], [-6.7388493616496956e-21, 2.0862448618437472e-21, 3.5269767470847850e-21, 9.9995905499879810e-22, 8.9749671324179675e-23, 2.1687103232829319e-24, 5.7642959849061129e-27]],
        [[7.9116793141186848e-2, 4.0281513969755089e-2, 1.0104176318875209e-2, 1.1578388081587349e-3, 5.2374189407055906e-5, 6.9565596664536994e-7, 1.2726732173066205e-9], [-1.7208402359328928e-3, -8.7615284396226826e-4, -2.1977574404620205e-4, -2.5184599086141295e-5, -1.1392458477063327e-6, -1.5132728580886940e-8, -2.7687645057858887e-11], [2.8069356141556994e-5, 1.4292659634532302e-5, 3.5859288712494756e-6, 4.1106305353634300e-7, 1.8605387435557688e-8, 2.4738033629701599e-10, 4.5354459684751362e-13], [-5.0840918890767415e-7, -2.5915685101004450e-7, -6.5171637564954231e-8, -7.5003977982260236e-9, -3.4168399074388522e-10, -4.5938974344444944e-12, -8.6185846440941867e-15], [9.6236232872586303e-9, 4.9482614783961343e-9, 1.2674534073717693e-9, 1.5040221519500163e-10, 7.1895413619305215e-12, 1.0447783834444034e-13, 2.2641547406141806e-16], [-1.8218349683040308e-10, -9.8800972676428372e-11, -2.8059897101376455e-11, -3.8628138638999424e-12, -2.2344330361277601e-13, -4.1128333925165314e-15, -1.2112196994495489e-17], [3.0350360031533728e-12, 2.1562981804501763e-12, 8.7293286697527426e-13, 1.6592160458511489e-13, 1.2498891899404720e-14, 2.8483226389376937e-16, 1.0086851375548193e-18], [-1.4064300750633285e-14, -5.8240084696025853e-14, -4.2444270890188050e-14, -1.0416140380409104e-14, -8.9560952514219626e-16, -2.2144467964250037e-17, -8.3798970060708649e-20], [-2.7922343708135908e-15, 2.1402615068754776e-15, 2.4846870907019321e-15, 6.7578181204044372e-16, 6.0786050480047330e-17, 1.5504797788192964e-18, 6.0897745648735123e-21], [2.2089406519838008e-16, -9.4188947572643236e-17, -1.3716021854599838e-16, -3.8707111646173750e-17, -3.5527879876909577e-18, -9.2578847971658401e-20, -3.7761127890739696e-22], [-1.1332208423442953e-17, 3.9983278557584342e-18, 6.4062815108681494e-18, 1.8421084097988717e-18, 1.7199072537480561e-19, 4.5963649662499228e-21, 1.9736083450541948e-23], [4.2102761373208988e-19, -1.3750579082675462e-19, -2.3160025297811266e-19, -6.7889101180207191e-20, -6.5028540838520055e-21, -1.8123696810044536e-22, -8.4726617927371609e-25], [-8.9597637336441614e-21, 2.7667414544929289e-21, 4.9710610995784196e-21, 1.5315530885203312e-21, 1.5762450059797757e-22, 4.9057583942820613e-24, 2.7795548972460489e-26], [-1.6269750575142410e-22, 5.6457614036977763e-23, 7.8395161564010668e-23, 1.7229569796227220e-23, 7.6712974847039194e-25, -2.1143555656350159e-26, -5.1916728707683738e-28]],
        [[7.5882028654427376e-2, 3.8634562764981473e-2, 9.6910547067904903e-3, 1.1104987712140625e-3, 5.0232761365911176e-5, 6.6721198610276890e-7, 1.2206337872608318e-9], [-1.5183237608433827e-3, -7.7303937696752306e-4, -1.9390856878767177e-4, -2.2220028652620478e-5, -1.0051121303437218e-6, -1.3350356475433848e-8, -2.4424040002691594e-11], [2.2784244604558010e-5, 1.1600460764109014e-5, 2.9098986013650308e-6, 3.3345537984134001e-7, 1.5084379570016982e-8, 2.0037302833705847e-10, 3.6663239860879298e-13], [-3.7986888448765288e-7, -1.9342753303372920e-7, -4.8530544298859590e-8, -5.5633338573644900e-9, -2.5181671660626055e-10, -3.3483980751982247e-12, -6.1393015706158942e-15], [6.6465447515220267e-9, 3.3875724924716458e-9, 8.5164798825295546e-10, 9.7963675079031253e-11, 4.4588401522668239e-12, 5.9848694494613918e-14, 1.1183005194696661e-16], [-1.1919082019833134e-10, -6.1157161798111398e-11, -1.5595363590632656e-11, -1.8369286995188288e-12, -8.6783751515809803e-14, -1.2371404764521332e-15, -2.5841740400962175e-18], [2.1340260678438843e-12, 1.1380387770854583e-12, 3.1329891020989610e-13, 4.1365009323227479e-14, 2.2777939028328466e-15, 3.9638149874894100e-17, 1.0876026833385115e-19], [-3.5081209344167379e-14, -2.2577012792807410e-14, -8.2158589564729539e-15, -1.4443554237053420e-15, -1.0298563218404624e-16, -2.2452823028020548e-18, -7.5609128900478720e-21], [3.1831390479659479e-16, 5.2979588373478888e-16, 3.3239534180973054e-16, 7.7556399166488489e-17, 6.4834014708648669e-18, 1.5624811374031397e-19, 5.6802949592497436e-22], [1.5543741101866739e-17, -1.6731483250499635e-17, -1.7603418988776538e-17, -4.6824783056480762e-18, -4.1437726803997850e-19, -1.0344904928897877e-20, -3.8923090182284689e-23], [-1.4610705852171146e-18, 6.7956047374290341e-19, 9.4733835641232143e-19, 2.6394540563846241e-19, 2.3868818411993480e-20, 6.0698030174502915e-22, 2.3476698688693947e-24], [8.0898289907470946e-20, -2.9300593893503147e-20, -4.5986496489982470e-20, -1.3059089957315860e-20, -1.1965989688332421e-21, -3.0944969989582091e-23, -1.2357127709650957e-25], [-3.5007096417923774e-21, 1.1554073711979034e-21, 1.9100412819094526e-21, 5.4923469898700956e-22, 5.1020731595548343e-23, 1.3481200218839244e-24, 5.6239654802962403e-27], [1.1878034148483996e-22, -3.7481985086665562e-23, -6.3997911868026519e-23, -1.8679162844530133e-23, -1.7717187627572014e-24, -4.8451205268405135e-26, -2.1654027452099595e-28]],
        [[7.3014387213888984e-2, 3.7174532078817996e-2, 9.3248219628117105e-3, 1.0685321069169098e-3, 4.8334422183013563e-5, 6.4199743426450606e-7, 1.1745047817669607e-9], [-1.3526403009583770e-3, -6.8868305747603320e-4, -1.7274856893962364e-4, -1.9795274208953132e-5, -8.9542771980529542e-7, -1.1893437410921415e-8, -2.1758505993695073e-11], [1.8793380297286808e-5, 9.5684637768831200e-6, 2.4001466959430251e-6, 2.7503357192045074e-7, 1.2441023111651344e-8, 1.6524762882910170e-10, 3.0231614779696399e-13], [-2.9012146407528662e-7, -1.4771366496967566e-7, -3.7053029021810836e-8, -4.2460416822809582e-9, -1.9207679187110878e-10, -2.5514544343933514e-12, -4.6685286490293515e-15], [4.7024307986956913e-9, 2.3944179018658604e-9, 6.0073305332644558e-10, 6.8861242144631964e-11, 3.1165874299385937e-12, 4.1433404684374266e-14, 7.5936424486386990e-17], [-7.8367820970976323e-11, -3.9931286359716570e-11, -1.0033030974901991e-11, -1.1529303303452559e-12, -5.2389333539057710e-14, -7.0116955700663895e-16, -1.3021579102031913e-18], [1.3270824215257283e-12, 6.7924969673884009e-13, 1.7230716490758208e-13, 2.0119390212381026e-14, 9.3759160241859696e-16, 1.3073507345767591e-17, 2.6208617884777304e-20], [-2.2480634373099612e-14, -1.1794031598996158e-14, -3.1459604258814309e-15, -3.9710419626976095e-16, -2.0661636573795785e-17, -3.3572184034759984e-19, -8.4371552760524817e-22], [3.6240065923144129e-16, 2.1366345060392380e-16, 6.9320805708182994e-17, 1.1022097962278872e-17, 7.2666093071026013e-19, 1.4873356009026644e-20, 4.7064681354682692e-23], [-4.3797763222694739e-18, -4.3548350719368109e-18, -2.2407884475326108e-18, -4.8236418420316225e-19, -3.8626203710157235e-20, -9.0138392742105338e-22, -3.1514830005060657e-24], [-4.2745361280230842e-20, 1.1421137473590179e-19, 1.0229370661946258e-19, 2.6245049999835516e-20, 2.2761553903550092e-21, 5.5665106288746738e-23, 2.0223403542967031e-25], [7.1671124310087360e-21, -4.0226227277479676e-21, -5.1745114907474922e-21, -1.4181995541365799e-21, -1.2650220009419967e-22, -3.1549301703549593e-24, -1.1733823647894942e-26], [-4.2662894033130661e-22, 1.6451873297704813e-22, 2.4917066849909177e-22, 6.9973585814628798e-23, 6.3238221504774733e-24, 1.5985885025300717e-25, 6.0819784432841555e-28], [1.9631676022065242e-23, -6.6485104682606549e-24, -1.0767798179904880e-23, -3.0599343929814004e-24, -2.7930794839207909e-25, -7.1603512863181143e-27, -2.7993884500503950e-29]],
        [[7.0449259867542214e-2, 3.5868523586823666e-2, 8.9972241091705325e-3, 1.0309926409393708e-3, 4.6636346397631112e-5, 6.1944289969336435e-7, 1.1332422908436251e-9], [-1.2150488770872106e-3, -6.1862976909120108e-4, -1.5517646482651976e-4, -1.7781683783122480e-5, -8.0434402505653842e-7, -1.0683624249563816e-8, -1.9545199568210683e-11], [1.5716706769298001e-5, 8.0020015646165405e-6, 2.0072141168860162e-6, 2.3000685799882401e-7, 1.0404227203563754e-8, 1.3819321855443029e-10, 2.5281829542419934e-13], [-2.2588324131422779e-7, -1.1500622180457059e-7, -2.8848080818495677e-8, -3.3057109770299162e-9, -1.4953240157377854e-10, -1.9861611884173967e-12, -3.6336291265505948e-15], [3.4087338424828924e-9, 1.7355345589452463e-9, 4.3534637069588332e-10, 4.9887655115717293e-11, 2.2567310625689371e-12, 2.9976841838247833e-14, 5.4848353345821528e-17], [-5.2908073849658597e-11, -2.6939402504021730e-11, -6.7584132861500586e-12, -7.7463254290454119e-13, -3.5053464406623356e-14, -4.6588981008014955e-16, -8.5336961552178910e-19], [8.3621543006795680e-13, 4.2596557521946570e-13, 1.0696396965778190e-13, 1.2279282180364095e-14, 5.5706275743167170e-16, 7.4349167547785785e-18, 1.3729643819485529e-20], [-1.3369392885047937e-14, -6.8287640668690702e-15, -1.7246536583338452e-15, -1.9990153051887554e-16, -9.2080047025220872e-18, -1.2598980331756658e-19, -2.4378907260666080e-22], [2.1426272080269748e-16, 1.1101476114635595e-16, 2.8880773699857187e-17, 3.5102374030043793e-18, 1.7346274933306484e-19, 2.6327359872850933e-21, 6.0158436849869722e-24], [-3.3480670683574693e-18, -1.8531724627159950e-18, -5.4473758642286470e-19, -7.7975238589127151e-20, -4.6689981827795078e-21, -8.7760499611342311e-23, -2.5565939194335113e-25], [4.5503879376856991e-20, 3.3316460046671426e-20, 1.3823845782749030e-20, 2.6514191719799071e-21, 1.9865491464196901e-22, 4.4270335572878427e-24, 1.4798722092867937e-26], [-2.0155532060400263e-22, -7.2101108114582864e-22, -5.1454830623877348e-22, -1.2432060460830590e-22, -1.0469170148096600e-23, -2.5009187983047391e-25, -8.8014761822751614e-28], [-2.5262363581397936e-23, 2.0901567403127772e-23, 2.3498480035481013e-23, 6.2814021686410103e-24, 5.5179494592575914e-25, 1.3523319776916001e-26, 4.8751410066863899e-29], [1.7479203538540974e-24, -7.6275966723473788e-25, -1.0869937900152131e-24, -3.0137921756133972e-25, -2.6912820242606838e-26, -6.6834639738468538e-28, -2.4538329383365259e-30]],
        [[6.8136917775174839e-2, 3.4691218146262939e-2, 8.7019100051441392e-3, 9.9715257372472329e-4, 4.5105610833813086e-5, 5.9911104794606627e-7, 1.0960461029857473e-9], [-1.0993043586363390e-3, -5.5969962485016977e-4, -1.4039448674113515e-4, -1.6087815633802992e-5, -7.2772288869620123e-7, -9.6659110622921197e-9, -1.7683339674665263e-11], [1.3301642084724380e-5, 6.7723956890194609e-6, 1.6987808791021605e-6, 1.9466344020981734e-7, 8.8054864508481785e-9, 1.1695805055343068e-10, 2.1396938067182262e-13], [-1.7883301242073264e-7, -9.1051011377533414e-8, -2.2839145224678204e-8, -2.6171398490513549e-9, -1.1838480804859420e-10, -1.5724356459762474e-12, -2.8767004869938678e-15], [2.5245174259612172e-9, 1.2853329779162945e-9, 3.2241195578038732e-10, 3.6945276214220499e-11, 1.6712024465134822e-12, 2.2197688986160726e-14, 4.0609990742923403e-17], [-3.6655737059760760e-11, -1.8662988628432951e-11, -4.6814548977119267e-12, -5.3645784441914413e-13, -2.4267040335810754e-14, -3.2233956200987630e-16, -5.8975672813258919e-19], [5.4208276257827062e-13, 2.7600743942288248e-13, 6.9239578823454209e-14, 7.9353517468009300e-15, 3.5903604018926519e-16, 4.7707174103088125e-18, 8.7342557838771132e-21], [-8.1196174658643124e-15, -4.1352333871101418e-15, -1.0379261584586563e-15, -1.1906091072719956e-16, -5.3946556483508315e-18, -7.1851242579086535e-20, -1.3213959809534059e-22], [1.2269678427108012e-16, 6.2580661546671149e-17, 1.5756990303864394e-17, 1.8170396670436157e-18, 8.3020577803555273e-20, 1.1209323942474711e-21, 2.1150820488787669e-24], [-1.8607866438594804e-18, -9.5631797659219581e-19, -2.4465947589163377e-19, -2.8959159034543093e-20, -1.3769762605498461e-21, -1.9772416416837957e-23, -4.1462826129685075e-26], [2.7912677898209777e-20, 1.4849798213271282e-20, 4.0673208323407237e-21, 5.3241418639634973e-22, 2.8914751283928369e-23, 4.9156041185321527e-25, 1.2868023397454990e-27], [-3.9212872214986109e-22, -2.4064529254416947e-22, -8.2383276286956584e-23, -1.3716752112906014e-23, -9.3312654267422768e-25, -1.9395466961088335e-26, -6.1012335531402158e-29], [3.9510020397111967e-24, 4.3887945422126837e-24, 2.3795605763244676e-24, 5.2166329370990236e-25, 4.1880064324737577e-26, 9.6857497397827643e-28, 3.2948079834044111e-30], [4.5272177965360589e-26, -1.0170894936749349e-25, -9.2728930122707283e-26, -2.3753298712685115e-26, -2.0430642469895322e-27, -4.9153216695307846e-29, -1.7242170113698691e-31]],
        [[6.6038377194801769e-2, 3.3622767569958092e-2, 8.4339009452923078e-3, 9.6644139380204753e-4, 4.3716408652969525e-5, 5.8065910019068517e-7, 1.0622891133453183e-9], [-1.0008400158964585e-3, -5.0956750693686357e-4, -1.2781939706578957e-4, -1.4646835083543563e-5, -6.6254097982857965e-7, -8.8001384617806581e-9, -1.6099448508263007e-11], [1.1375902998402512e-5, 5.7919252213907709e-6, 1.4528406535570932e-6, 1.6648112846339118e-7, 7.5306760408299331e-9, 1.0002549872075533e-10, 1.8299204902546949e-13], [-1.4366881546577526e-7, -7.3147515199359843e-8, -1.8348248669503150e-8, -2.1025273197118536e-9, -9.5106589151546124e-11, -1.2632443791687137e-12, -2.3110475608993521e-15], [1.9051431026426560e-9, 9.6998424813725155e-10, 2.4330988135710033e-10, 2.7880902008725808e-11, 1.2611764321886642e-12, 1.6751462241112256e-14, 3.0646044712899428e-17], [-2.5985235751363502e-11, -1.3230122725662403e-11, -3.3186329392538270e-12, -3.8028286908156804e-13, -1.7201904295458199e-14, -2.2848337100750517e-16, -4.1800214773098552e-19], [3.6098883284805222e-13, 1.8379435216998346e-13, 4.6103088591502404e-14, 5.2830139735256837e-15, 2.3897812310052910e-16, 3.1742925909630365e-18, 5.8075217068429858e-21], [-5.0799550670499109e-15, -2.5864682625691510e-15, -6.4881951785069292e-16, -7.4354496604112136e-17, -3.3638265338799731e-18, -4.4689318866544526e-20, -8.1789928533206865e-23], [7.2169214918357296e-17, 3.6749949715908375e-17, 9.2213768006334485e-18, 1.0572648532764306e-18, 4.7866809964623850e-20, 6.3669890821103208e-22, 1.1679550418779918e-24], [-1.0324867551680130e-18, -5.2615611129263288e-19, -1.3223467468862320e-19, -1.5201641430394728e-20, -6.9114980142885235e-22, -9.2566651122163021e-24, -1.7200273606605389e-26], [1.4830622955377509e-20, 7.5861591585962599e-21, 1.9217743210062618e-21, 2.2384944996097948e-22, 1.0387625854838729e-23, 1.4370572553952069e-25, 2.8296214747383603e-28], [-2.1231111099324897e-22, -1.1045299428311822e-22, -2.8967211218050803e-23, -3.5626634650727967e-24, -1.7874966576196475e-25, -2.7612399134225720e-27, -6.4175902645294626e-30], [2.9523854708954448e-24, 1.6458784347505913e-24, 4.8930081961614549e-25, 7.0847042349649969e-26, 4.2769501281080804e-27, 8.0520157820478683e-29, 2.3181078240417033e-31], [-3.6027559277481188e-26, -2.6201486711845447e-26, -1.0787989831939613e-26, -2.0528782219637887e-27, -1.5233336863789527e-28, -3.3463047830055913e-30, -1.0886409355786100e-32]],
        [[6.4122586512657729e-2, 3.2647362244226133e-2, 8.1892312618214190e-3, 9.3840467491601455e-4, 4.2448184146052168e-5, 5.6381402705394431e-7, 1.0314718269182852e-9], [-9.1624735783336946e-4, -4.6649801611793643e-4, -1.1701588963278406e-4, -1.3408860289835718e-5, -6.0654191734822429e-7, -8.0563361631894303e-9, -1.4738696417244224e-11], [9.8190237893130922e-6, 4.9992560183571572e-6, 1.2540083136139467e-6, 1.4369691443277031e-7, 6.5000455009232517e-9, 8.6336245090328646e-11, 1.5794818891795489e-13], [-1.1691750318982357e-7, -5.9527356698170308e-8, -1.4931781835018506e-8, -1.7110340929718932e-9, -7.7397621989457625e-11, -1.0280266602184670e-12, -1.8807274886393247e-15], [1.4617709002315294e-9, 7.4424577632353126e-10, 1.8668585701540278e-10, 2.1392347634077198e-11, 9.6767028598432610e-13, 1.2852990060313424e-14, 2.3513954706120254e-17], [-1.8798066176015829e-11, -9.5708442516585137e-12, -2.4007409776432385e-12, -2.7510112331165156e-13, -1.2444039092024685e-14, -1.6528681263536780e-16, -3.0238471956361922e-19], [2.4621568237500426e-13, 1.2535823395289532e-13, 3.1444745874404590e-14, 3.6032585544635258e-15, 1.6299146613418526e-16, 2.1649227569574736e-18, 3.9606395661952620e-21], [-3.2667932249376328e-15, -1.6632573304751678e-15, -4.1721127856369307e-16, -4.7808559512729073e-17, -2.1626123611904214e-18, -2.8725128966473674e-20, -5.2552754777895768e-23], [4.3760377246989506e-17, 2.2280421779454243e-17, 5.5889427220172045e-18, 6.4046496262537184e-19, 2.8973017976527781e-20, 3.8487345643668118e-22, 7.0425019413099597e-25], [-5.9051520894599252e-19, -3.0067792613512579e-19, -7.5434059753079111e-20, -8.6463501836497393e-21, -3.9128055628971696e-22, -5.2007616241474143e-24, -9.5268219993831670e-27], [8.0140274210188228e-21, 4.0820234075685857e-21, 1.0248703510962001e-21, 1.1761997731182812e-22, 5.3333392756168367e-24, 7.1117482333500906e-26, 1.3105553390627419e-28], [-1.0918717838288089e-22, -5.5712869163631501e-23, -1.4039690633778978e-23, -1.6212272129114755e-24, -7.4225262359167456e-26, -1.0051862135291646e-27, -1.9053204704527314e-30], [1.4879774158164041e-24, 7.6518130117214384e-25, 1.9599124522019410e-25, 2.3237706356476113e-26, 1.1071249280104556e-27, 1.5924243510395742e-29, 3.3357449041498543e-32], [-2.0046941840730841e-26, -1.0640571450276436e-26, -2.9007612863136315e-27, -3.7699517390367778e-28, -2.0267730119395975e-29, -3.3951780496624171e-31, -8.6669156504186157e-34]],
        [[6.2364464172616069e-2, 3.1752232150032574e-2, 7.9646977360826163e-3, 9.1267535997884579e-4, 4.1284333701143837e-5, 5.4835529261256415e-7, 1.0031907833631488e-9], [-8.4293623676003444e-4, -4.2917240502856807e-4, -1.0765317117135991e-4, -1.2335985621472207e-5, -5.5801106205079608e-7, -7.4117296267143276e-9, -1.3559418410781200e-11], [8.5448984178144485e-6, 4.3505480542569844e-6, 1.0912870652604150e-6, 1.2505067337527055e-7, 5.6565937413974133e-9, 7.5133176151384649e-11, 1.3745268962579338e-13], [-9.6244278665235392e-8, -4.9001794849851031e-8, -1.2291560563833460e-8, -1.4084909225979691e-9, -6.3712259380604646e-11, -8.4625211321495411e-13, -1.5481793134581593e-15], [1.1382340609075321e-9, 5.7952028652406609e-10, 1.4536628143660240e-10, 1.6657533992687702e-11, 7.5349376402699827e-13, 1.0008210299873300e-14, 1.8309560388586357e-17], [-1.3845937233848068e-11, -7.0495180184025919e-12, -1.7682939603654066e-12, -2.0262894925054463e-13, -9.1658015302060413e-15, -1.2174390088795885e-16, -2.2272487040603084e-19], [1.7154650631188061e-13, 8.7341158658948357e-14, 2.1908568300201104e-14, 2.5105047278322151e-15, 1.1356121404218651e-16, 1.5083663419846292e-18, 2.7594873667066357e-21], [-2.1530054696595338e-15, -1.0961809414856323e-15, -2.7496498086711937e-16, -3.1508271698821292e-17, -1.4252590219188712e-18, -1.8930887632805558e-20, -3.4633248389641732e-23], [2.7281239403648240e-17, 1.3889977281598989e-17, 3.4841541583513340e-18, 3.9925071255189645e-19, 1.8059956620858666e-20, 2.3988148950983843e-22, 4.3885814647342049e-25], [-3.4824670269886209e-19, -1.7730730261034894e-19, -4.4476136027370483e-20, -5.0966291607131724e-21, -2.3055047388247953e-22, -3.0624236131518888e-24, -5.6030914191620342e-27], [4.4714717489815243e-21, 2.2766853484551606e-21, 5.7112452890072708e-22, 6.5453422238576481e-23, 2.9613303563357072e-24, 3.9346047398611213e-26, 7.2023501524149552e-29], [-5.7683617564182379e-23, -2.9374741375115593e-23, -7.3713706144628559e-24, -8.4526651485653824e-25, -3.8276431851245198e-26, -5.0928787999251540e-28, -9.3469910640304507e-31], [7.4681701372905130e-25, 3.8060180546279284e-25, 9.5665137324248813e-26, 1.0999661198460576e-26, 5.0022701197983153e-28, 6.7015114033679743e-30, 1.2454193039920089e-32], [-9.6892967627921091e-27, -4.9544479586415041e-27, -1.2542377746445976e-27, -1.4592143885725914e-28, -6.7571114532401571e-30, -9.3155898735272295e-32, -1.8196862460434515e-34]],
        [[6.0743499128502463e-2, 3.0926934296990440e-2, 7.7576808589490879e-3, 8.8895327922698167e-4, 4.0211279315334460e-5, 5.3410254831543611e-7, 9.7711604330111867e-10], [-7.7890686264371741e-4, -3.9657250092716372e-4, -9.9475844261990354e-5, -1.1398945067269527e-5, -5.1562458310375635e-7, -6.8487351931819680e-9, -1.2529445992507927e-11], [7.4907718050027874e-6, 3.8138502188848702e-6, 9.5666232410309462e-7, 1.0962401336004259e-7, 4.9587778389457038e-9, 6.5864501836459616e-11, 1.2049607632735250e-13], [-8.0043045946305360e-8, -4.0753102116756766e-8, -1.0222466837422417e-8, -1.1713933045390301e-9, -5.2987287923561467e-11, -7.0379868510088731e-13, -1.2875673194928813e-15], [8.9806826605734538e-10, 4.5724231657996630e-10, 1.1469419934105714e-10, 1.3142817611075949e-11, 5.9450763309126426e-13, 7.8964919108581916e-15, 1.4446268711385443e-17], [-1.0364044118126255e-11, -5.2767475715196530e-12, -1.3236140137669701e-12, -1.5167303729196470e-13, -6.8608407344635658e-15, -9.1128474004056131e-17, -1.6671535141145675e-19], [1.2181980922505006e-13, 6.2023315953800423e-14, 1.5557865744688552e-14, 1.7827771026414537e-15, 8.0642875137594987e-17, 1.0711314363109333e-18, 1.9595857109459303e-21], [-1.4504753308091743e-15, -7.3849475578651354e-16, -1.8524327878996474e-16, -2.1227042844802546e-17, -9.6019284665592297e-19, -1.2753672211001277e-20, -2.3332259008756269e-23], [1.7436473585691784e-17, 8.8776035398899788e-18, 2.2268493369319672e-18, 2.5517489576650412e-19, 1.1542689974592758e-20, 1.5331477092512502e-22, 2.8048256028043392e-25], [-2.1116015664722590e-19, -1.0751008813196197e-19, -2.6967744732084487e-20, -3.0902404550706499e-21, -1.3978552120622090e-22, -1.8566946172268918e-24, -3.3967588279512882e-27], [2.5722427024664559e-21, 1.3096346627271088e-21, 3.2850927476023888e-22, 3.7644254633284014e-23, 1.7028404483534062e-24, 2.2618341170252580e-26, 4.1380936372637124e-29], [-3.1483427288887455e-23, -1.6029716702963378e-23, -4.0210106981231951e-24, -4.6079316672104557e-25, -2.0845491686802792e-26, -2.7691614296532314e-28, -5.0673059844042500e-31], [3.8686707964007690e-25, 1.9698596360467309e-25, 4.9420410078866219e-26, 5.6647560142473636e-27, 2.5635866399401042e-28, 3.4075697752532569e-30, 6.2423216907196591e-33], [-4.7748764516896318e-27, -2.4313467873014926e-27, -6.1048149387814538e-28, -7.0045081599106655e-29, -3.1758172083671722e-30, -4.2334992432677236e-32, -7.7951648416546972e-35]],
        [[5.9242732597050248e-2, 3.0162834293216272e-2, 7.5660147883105047e-3, 8.6699024863721851e-4, 3.9217794530145093e-5, 5.2090667978011439e-7, 9.5297480882878230e-10], [-7.2259326537114967e-4, -3.6790100606988639e-4, -9.2283915546527478e-5, -1.0574821372080089e-5, -4.7834583193421703e-7, -6.3535836750835199e-9, -1.1623589067232254e-11], [6.6101089226838871e-6, 3.3654696762747200e-6, 8.4419100316550435e-7, 9.6735915565821868e-8, 4.3757923071327775e-9, 5.8121051156098160e-11, 1.0632978950815383e-13], [-6.7186105373298037e-8, -3.4207121689762848e-8, -8.5804797405426942e-9, -9.8323786984576874e-10, -4.4476187378672887e-11, -5.9075078989708529e-13, -1.0807513954425704e-15], [7.1703289191550165e-10, 3.6506999852188136e-10, 9.1573788482054161e-11, 1.0493447854136825e-11, 4.7466494865846842e-13, 6.3046926880104359e-15, 1.1534145255412988e-17], [-7.8710537264784107e-12, -4.0074668884754949e-12, -1.0052289333062484e-12, -1.1518926505141474e-13, -5.2105187296378641e-15, -6.9208226621970097e-17, -1.2661326701587333e-19], [8.8002589441454410e-14, 4.4805622671863176e-14, 1.1238996987664581e-14, 1.2878775771174377e-15, 5.8256385569099051e-17, 7.7378498091639832e-19, 1.4156040290565118e-21], [-9.9669391545964660e-16, -5.0745656228942676e-16, -1.2728988994923212e-16, -1.4586158838903765e-17, -6.5979632686572584e-19, -8.7636828934809155e-21, -1.6032754811088291e-23], [1.1396829672905966e-17, 5.8025798433966589e-18, 1.4555132580295913e-18, 1.6678738429486654e-19, 7.5445294741374754e-21, 1.0020950837789718e-22, 1.8332869501524124e-25], [-1.3128387840559537e-19, -6.6841852140398609e-20, -1.6766543375915670e-20, -1.9212797401539568e-21, -8.6907972467873609e-23, -1.1543472532640531e-24, -2.1118260256307120e-27], [1.5211983995736144e-21, 7.7450282196536871e-22, 1.9427557736697255e-22, 2.2262068262525685e-23, 1.0070125662028205e-24, 1.3375570756930671e-26, 2.4470058672328814e-29], [-1.7710590979621836e-23, -9.0171767909632091e-24, -2.2618648817614064e-24, -2.5918832126741495e-25, -1.1724305271280186e-26, -1.5572848865172231e-28, -2.8490312666785689e-31], [2.0701772460794428e-25, 1.0540176221965371e-25, 2.6439278970963005e-26, 3.0297382834670320e-27, 1.3705324680876384e-28, 1.8205050551055708e-30, 3.3308312537995349e-33], [-2.4333400697673635e-27, -1.2395610879369701e-27, -3.1082176175848786e-28, -3.5629924077443222e-29, -1.6115218809660196e-30, -2.1410386934771383e-32, -3.9247867186606644e-35]],
        [[5.7848004091752507e-2, 2.9452722471139117e-2, 7.3878910584593545e-3, 8.4657903597736034e-4, 3.8294505317303708e-5, 5.0864317735474682e-7, 9.3053929526554827e-10], [-6.7275355682365485e-4, -3.4252562576180228e-4, -8.5918780864434724e-5, -9.8454400722757215e-6, -4.4535269735765138e-7, -5.9153554576704553e-9, -1.0821870702075408e-11], [5.8678633878734436e-6, 2.9875629172525693e-6, 7.4939725468785672e-7, 8.5873492234470872e-8, 3.8844369695404624e-9, 5.1594669941552317e-11, 9.4390075291201815e-14], [-5.6866991500014647e-8, -2.8953249895398743e-8, -7.2626038637060114e-9, -8.3222236616248330e-10, -3.7645089792940063e-11, -5.0001737652513031e-13, -9.1475878943662355e-16], [5.7866780576392453e-10, 2.9462282327175329e-10, 7.3902890430600455e-11, 8.4685382122739621e-12, 3.8306935066651347e-13, 5.0880827433539627e-15, 9.3084133259726574e-18], [-6.0566517199589041e-12, -3.0836825749318266e-12, -7.7350781221656683e-13, -8.8636322978500312e-14, -4.0094119950541098e-15, -5.3254639003508150e-17, -9.7426912331281564e-20], [6.4566117250642084e-14, 3.2873181405004858e-14, 8.2458755113066183e-15, 9.4489554406760154e-16, 4.2741794799074533e-17, 5.6771388303974166e-19, 1.0386064340770329e-21], [-6.9723716790704179e-16, -3.5499120714284086e-16, -8.9045634669643555e-17, -1.0203746504282891e-17, -4.6156047834886251e-19, -6.1306337904619197e-21, -1.1215712512263981e-23], [7.6017273950166931e-18, 3.8703421288883567e-18, 9.7083269794300598e-19, 1.1124779772023888e-19, 5.0322287754942639e-21, 6.6840107120134256e-23, 1.2228090164697754e-25], [-8.3492824141549885e-20, -4.2509521636109074e-20, -1.0663045364543968e-20, -1.2218792403167753e-21, -5.5270990024658256e-23, -7.3413175368441464e-25, -1.3430603035773568e-27], [9.2242946732959847e-22, 4.6964558031884129e-22, 1.1780542412890129e-22, 1.3499333652573609e-23, 6.1063446422059910e-25, 8.1106958276652588e-27, 1.4838147358036370e-29], [-1.0239767170593367e-23, -5.2134726344119165e-24, -1.3077428008396841e-24, -1.4985436652999672e-25, -6.7785781435331464e-27, -9.0035855684283438e-29, -1.6471671602373319e-31], [1.1412518332481397e-25, 5.8105310824288493e-26, 1.4575124387780794e-26, 1.6701721705358743e-27, 7.5549361866880455e-29, 1.0035014985722005e-30, 1.8358841383783716e-33], [-1.2816735821540810e-27, -6.5219779679241098e-28, -1.6356537831691917e-28, -1.8732365011088011e-29, -8.4889489291605393e-31, -1.1267979859895946e-32, -2.0583115992603758e-35]],
        [[5.6547384300546351e-2, 2.8790525142945952e-2, 7.2217861516994480e-3, 8.2754506123095477e-4, 3.7433514652333892e-5, 4.9720714955195033e-7, 9.0961760846028211e-10], [-6.2839155783802794e-4, -3.1993916552168302e-4, -8.0253216066011147e-5, -9.1962225422168912e-6, -4.1598572380836836e-7, -5.5252913842053108e-9, -1.0108266422709412e-11], [5.2372699174426792e-6, 2.6665026703467003e-6, 6.6886282770349500e-7, 7.6645045710297590e-8, 3.4669936128402645e-9, 4.6050017685091993e-11, 8.4246389043306482e-14], [-4.8499353056137006e-8, -2.4692951952612847e-8, -6.1939550449517164e-9, -7.0976581129173141e-10, -3.2105839478026546e-11, -4.2644280343702075e-13, -7.8015749241946820e-16], [4.7158044294109097e-10, 2.4010038249082893e-10, 6.0226536635954738e-11, 6.9013637209959561e-12, 3.1217913328696543e-13, 4.1464900758799969e-15, 7.5858128543105169e-18], [-4.7163916251705167e-12, -2.4013027896524717e-12, -6.0234035837302679e-13, -6.9022230550871798e-14, -3.1221800475972280e-15, -4.1470063825734927e-17, -7.5867574136566664e-20], [4.8043289423781670e-14, 2.4460751796294314e-14, 6.1357101930441549e-15, 7.0309152898479969e-16, 3.1803932239106158e-17, 4.2243274883552799e-19, 7.7282128199041437e-22], [-4.9574621623309485e-16, -2.5240413998875960e-16, -6.3312798698735322e-17, -7.2550187412703486e-18, -3.2817651035430843e-19, -4.3589737373035492e-21, -7.9745419386979288e-24], [5.1646629916063289e-18, 2.6295355931206842e-18, 6.5959004352659615e-19, 7.5582476621502985e-20, 3.4189289245589762e-21, 4.5411602971997934e-23, 8.3078438704511943e-26], [-5.4203792019820390e-20, -2.7597308989858920e-20, -6.9224810224158099e-21, -7.9324766242604659e-22, -3.5882091984185262e-23, -4.7660052369800678e-25, -8.7191873541496060e-28], [5.7222195105156566e-22, 2.9134098257207376e-22, 7.3079677032991750e-23, 8.3742061170507438e-24, 3.7880229565096484e-25, 5.0314059946777482e-27, 9.2047259953941967e-30], [-6.0697694268101615e-24, -3.0903623708144837e-24, -7.7518316293842696e-25, -8.8828302606253015e-26, -4.0180951562600100e-27, -5.3370006991675241e-29, -9.7637891606832096e-32], [6.4644277475278612e-26, 3.2913192770876149e-26, 8.2555913713594964e-27, 9.4599697911786798e-28, 4.2795291408966093e-29, 5.6840361653220445e-31, 1.0398229910444892e-33], [-6.9629653007445344e-28, -3.5507192816072899e-28, -8.8870111353804611e-29, -1.0198184241519291e-29, -4.6068244269742682e-31, -6.1206311569672479e-33, -1.1185038657779570e-35]],
        [[5.5330742429256445e-2, 2.8171084317899790e-2, 7.0664062428612200e-3, 8.0974006486681666e-4, 3.6628116102446704e-5, 4.8650951880683097e-7, 8.9004678510559913e-10], [-5.8869988159930852e-4, -2.9973055257076566e-4, -7.5184108071996428e-5, -8.6153530457826780e-6, -3.8971043340482195e-7, -5.1762923023255520e-9, -9.4697886564496747e-12], [4.6976273857036289e-6, 2.3917491681217349e-6, 5.9994393762950356e-7, 6.8747624503380596e-8, 3.1097584043731397e-9, 4.1305074513947316e-11, 7.5565733780191434e-14], [-4.1650445327777760e-8, -2.1205900295068033e-8, -5.3192665408106988e-9, -6.0953518461400097e-10, -2.7571965966930437e-11, -3.6622205350696729e-13, -6.6998640059099762e-16], [3.8774804978744905e-10, 1.9741797281374784e-10, 4.9520124245188339e-11, 5.6745150562240520e-12, 2.5668335472401557e-13, 3.4093725989953987e-15, 6.2372903379262095e-18], [-3.7129050797075955e-12, -1.8903878291265275e-12, -4.7418296741530803e-13, -5.4336664719992427e-14, -2.4578871051798020e-15, -3.2646655085344838e-17, -5.9725553724879464e-20], [3.6211530736263033e-14, 1.8436732291379782e-14, 4.6246512449287550e-15, 5.2993916148511604e-16, 2.3971486624294770e-17, 3.1839902412811698e-19, 5.8249636821294317e-22], [-3.5775336317220186e-16, -1.8214648342776964e-16, -4.5689439323125596e-17, -5.2355565601139462e-18, -2.3682732504580872e-19, -3.1456367459939179e-21, -5.7547977267746239e-24], [3.5684242135073751e-18, 1.8168268667156985e-18, 4.5573101014819930e-19, 5.2222253439299094e-20, 2.3622429531457780e-21, 3.1376270601239145e-23, 5.7401443749563485e-26], [-3.5857031753208269e-20, -1.8256242741643897e-20, -4.5793774293671931e-21, -5.2475123129045539e-22, -2.3736813649459328e-23, -3.1528200235739210e-25, -5.7679392036169752e-28], [3.6242601216330950e-22, 1.8452551376822615e-22, 4.6286192972265038e-23, 5.3039386078552827e-24, 2.3992054778681386e-25, 3.1867221667685641e-27, 5.8299616528370981e-30], [-3.6807553949599591e-24, -1.8740192342552048e-24, -4.7007705765171324e-25, -5.3866203871436661e-26, -2.4366063368999046e-27, -3.2363994842432571e-29, -5.9208453965597249e-32], [3.7532987620680458e-26, 1.9109282047262516e-26, 4.7932914234458848e-27, 5.4930735565602601e-28, 2.4846889938383367e-29, 3.3001669387229031e-31, 6.0380064986867713e-34], [-3.8742931207666942e-28, -1.9871547070536077e-28, -4.9817974844894790e-29, -5.6961304035196888e-30, -2.5907884744746295e-31, -3.4409876690539135e-33, -6.2679038063488402e-36]],
        [[5.4189411878963647e-2, 2.7589987485374865e-2, 6.9206445022507634e-3, 7.9303721518049284e-4, 3.5872572510006320e-5, 4.7647408186086142e-7, 8.7168741484539132e-10], [-5.5301796926773417e-4, -2.8156347009935489e-4, -7.0627095514656483e-5, -8.0931646069978100e-6, -3.6608954616823272e-7, -4.8625500817013302e-9, -8.8958116960330898e-12], [4.2327395162010772e-6, 2.1550562412760546e-6, 5.4057212371459981e-7, 6.1944203528357704e-8, 2.8020096536577522e-9, 3.7217430579293924e-11, 6.8087577234318788e-14], [-3.5996509523951371e-8, -1.8327256429747932e-8, -4.5971904307354075e-9, -5.2679242455802098e-10, -2.3829145828142064e-11, -3.1650839584547448e-13, -5.7903755073916047e-16], [3.2143129685998511e-10, 1.6365347307298374e-10, 4.1050671345797452e-11, 4.7039997611166525e-12, 2.1278266553897319e-13, 2.8262658099111373e-15, 5.1705232903450448e-18], [-2.9522300631923011e-12, -1.5030978870808290e-12, -3.7703555081657338e-13, -4.3204534367626508e-14, -1.9543317289479273e-15, -2.5958228001135612e-17, -4.7489384043526547e-20], [2.7617289871739354e-14, 1.4061062032619188e-14, 3.5270625513489893e-15, 4.0416638400939757e-16, 1.8282228928164959e-17, 2.4283199205988464e-19, 4.4424995914520749e-22], [-2.6170723462839096e-16, -1.3324557469560586e-16, -3.3423184930954138e-17, -3.8299654738061342e-18, -1.7324623805789743e-19, -2.3011269178272992e-21, -4.2098058437894903e-24], [2.5038385023137463e-18, 1.2748038878602743e-18, 3.1977051539628650e-19, 3.6642529311275752e-20, 1.6575032854770088e-21, 2.2015632023879832e-23, 4.0276586063542551e-26], [-2.4132482889713550e-20, -1.2286808027455394e-20, -3.0820104746206049e-21, -3.5316783040939949e-22, -1.5975339318270863e-23, -2.1219094705936925e-25, -3.8819357683733717e-28], [2.3396175369348861e-22, 1.1911924556788016e-22, 2.9879750581200477e-23, 3.4239230692961700e-24, 1.5487914702903817e-25, 2.0571677868332969e-27, 3.7634937936632714e-30], [-2.2790837854305237e-24, -1.1603723002160941e-24, -2.9106674071309443e-25, -3.3353355145361538e-26, -1.5087195098546630e-27, -2.0039420152285483e-29, -3.6661229651369191e-32], [2.2292871098300699e-26, 1.1350637829187560e-26, 2.8471398749614211e-27, 3.2622700025079216e-28, 1.4758318623984629e-29, 1.9603623905693108e-31, 3.5860386341124517e-34], [-2.2389562906397789e-28, -1.1311701908794151e-28, -2.8479991698760368e-29, -3.2745211180170180e-30, -1.4707226453888528e-31, -1.9595692341524817e-33, -3.5533514947713720e-36]],
        [[5.3115928886069148e-2, 2.7043434546105570e-2, 6.7835477168191609e-3, 7.7732728341134673e-4, 3.5161942976198525e-5, 4.6703521168867534e-7, 8.5441943605560942e-10], [-5.2080072144018826e-4, -2.6516038629470719e-4, -6.6512562595322278e-5, -7.6216799458429044e-6, -3.4476221452366963e-7, -4.5792717982425479e-9, -8.3775671073124514e-12], [3.8298005533700635e-6, 1.9499039697085299e-6, 4.8911193580764054e-7, 5.6047376419679099e-8, 2.5352701438518983e-9, 3.3674488043034259e-11, 6.1605926840415918e-14], [-3.1292290884220315e-8, -1.5932151391727926e-8, -3.9964047101013249e-9, -4.5794834007182801e-10, -2.0715024113117780e-11, -2.7514536606679677e-13, -5.0336579046810050e-16], [2.6846489893081619e-10, 1.3668617069156687e-10, 3.4286220544019541e-11, 3.9288607947497553e-12, 1.7771970979861836e-13, 2.3605453869040212e-15, 4.3185091997017615e-18], [-2.3690375559782670e-12, -1.2061713581209190e-12, -3.0255480118563952e-13, -3.4669779222688547e-14, -1.5682670942356021e-15, -2.0830360678205454e-17, -3.8108186659320377e-20], [2.1292429135148644e-14, 1.0840823566864243e-14, 2.7193011978588131e-15, 3.1160494495643903e-16, 1.4095266613537540e-17, 1.8721905757932416e-19, 3.4250865372099657e-22], [-1.9385735853860355e-16, -9.8700500901805390e-17, -2.4757933627101622e-17, -2.8370136236407823e-18, -1.2833064448654776e-19, -1.7045397563635813e-21, -3.1183770750402649e-24], [1.7819490791026157e-18, 9.0726123586359051e-19, 2.2757648902205640e-19, 2.6078008346726304e-20, 1.1796233864290390e-21, 1.5668237058642048e-23, 2.8664318956317876e-26], [-1.6501119106551208e-20, -8.4013768350091231e-21, -2.1073928516231655e-21, -2.4148631791476943e-22, -1.0923491713949542e-23, -1.4509025478515923e-25, -2.6543594694314578e-28], [1.5370170255504218e-22, 7.8255656439781290e-23, 1.9629569643710486e-23, 2.2493539712890827e-24, 1.0174820559754993e-25, 1.3514610001203333e-27, 2.4724357879980145e-30], [-1.4385212745645719e-24, -7.3240900459366092e-25, -1.8371668222937018e-25, -2.1052079176049556e-26, -9.5227875730419091e-28, -1.2648562965356400e-29, -2.3139956425325510e-32], [1.3519441846470185e-26, 6.8836143457604280e-27, 1.7265946543992014e-27, 1.9785045302748170e-28, 8.9495763452881265e-30, 1.1888039024022493e-31, 2.1748618641444056e-34], [-1.3331749298235100e-28, -6.6651703090236024e-29, -1.6585448362224800e-29, -1.9320929202092750e-30, -8.7217113195821966e-32, -1.1583522846320105e-33, -2.0873421115315762e-36]],
        [[5.2103826020344224e-2, 2.6528132673820391e-2, 6.6542899173612829e-3, 7.6251562168112830e-4, 3.4491946159857419e-5, 4.5813604177754671e-7, 8.3813881406709405e-10], [-4.9159475378564451e-4, -2.5029046513950207e-4, -6.2782606641329049e-5, -7.1942639903580249e-6, -3.2542830488920772e-7, -4.3224709557802052e-9, -7.9077617789263289e-12], [3.4785872893962372e-6, 1.7710873112185127e-6, 4.4425774639759501e-7, 5.0907531214893290e-8, 2.3027722657328707e-9, 3.0586356770027249e-11, 5.5956332731209439e-14], [-2.7349869414208559e-8, -1.3924907628635479e-8, -3.4929097186270968e-9, -4.0025280813601065e-10, -1.8105200622804102e-11, -2.4048063018761631e-13, -4.3994825076308685e-16], [2.2578577935107738e-10, 1.1495653137158519e-10, 2.8835579836935508e-11, 3.3042714337603921e-12, 1.4946677700785394e-13, 1.9852784553896710e-15, 3.6319756108627579e-18], [-1.9172211393008142e-12, -9.7613362843193904e-13, -2.4485237018141409e-13, -2.8057652970884523e-14, -1.2691714479371223e-15, -1.6857650791873858e-17, -3.0840296667859390e-20], [1.6581227196965844e-14, 8.4421630535177896e-15, 2.1176236253968199e-15, 2.4265866309690463e-16, 1.0976522060372315e-17, 1.4579462538635952e-19, 2.6672456055752397e-22], [-1.4526632550726784e-16, -7.3960871022992983e-17, -1.8552269938443511e-17, -2.1259061179164949e-18, -9.6164114249126707e-20, -1.2772908336036937e-21, -2.3367448244013296e-24], [1.2848994814220256e-18, 6.5419349247851066e-19, 1.6409723271976378e-19, 1.8803915215202326e-20, 8.5058405723897045e-22, 1.1297803011094768e-23, 2.0668810907121377e-26], [-1.1449287724777581e-20, -5.8292883074052892e-21, -1.4622127719100944e-21, -1.6755508018838726e-22, -7.5792556120676707e-24, -1.0067075223409483e-25, -1.8417251027372584e-28], [1.0262069693968315e-22, 5.2248282195259239e-23, 1.3105906260375569e-23, 1.5018068659118242e-24, 6.7933350974981990e-26, 9.0231837799550191e-28, 1.6507498906944856e-30], [-9.2419450128827764e-25, -4.7054389426598153e-25, -1.1803087592696883e-25, -1.3525151403356745e-26, -6.1180323208569342e-28, -8.1262133508825865e-30, -1.4866577811508112e-32], [8.3601224847022200e-27, 4.2569329202045218e-27, 1.0677725390232158e-27, 1.2233815155538824e-28, 5.5342422350514817e-30, 7.3503460243600354e-32, 1.3453826718748786e-34], [-7.9717211832959032e-29, -4.1591282547589953e-29, -1.0383733835018542e-29, -1.1854924206251031e-30, -5.5122866336854672e-32, -7.1889204229945428e-34, -1.3127752982218904e-36]],
    ],
    [
        [[1.8101349267660290e-1, 1.6275060954349324e-1, 1.3307068538207990e-1, 1.0075762442652272e-1, 7.1730147106646339e-2, 4.7845170166806198e-2, 2.8367700433385600e-2, 1.1704536353205484e-2], [-8.2196716924759106e-3, -1.8771057505266062e-2, -3.2940789023690632e-2, -4.2702387135756698e-2, -4.4103005691675432e-2, -3.7683261440428902e-2, -2.6010124991459377e-2, -1.1593837257248806e-2], [2.1163758971935661e-4, 1.0302440453500114e-3, 2.9231765956319997e-3, 5.5446092924308489e-3, 7.7135994951144269e-3, 8.2083868273804542e-3, 6.5599769008284787e-3, 3.1651041346434367e-3], [-5.6541430895553266e-6, -4.9280867506360026e-5, -2.0835643612861803e-4, -5.4409475924312561e-4, -9.7500304397395664e-4, -1.2560460483224346e-3, -1.1443227013697632e-3, -5.9350554506710283e-4], [1.5032549035167037e-7, 2.1341185944397339e-6, 1.2777284523830110e-5, 4.4002346853191406e-5, 9.8243181749831046e-5, 1.4963182499502840e-4, 1.5308731880330288e-4, 8.4693009189075765e-5], [-3.9248034692223045e-9, -8.5618782098511534e-8, -6.9825763219282826e-7, -3.0696833682056667e-6, -8.3187284576651425e-6, -1.4687624230462133e-5, -1.6651922891383350e-5, -9.7560163521594998e-6], [1.0031165946413806e-10, 3.2265860178420669e-9, 3.4746459069775458e-8, 1.8997298648023238e-7, 6.1160755121889434e-7, 1.2311655936623707e-6, 1.5289401205922903e-6, 9.4252817745521629e-7], [-2.5120520335206979e-12, -1.1528161609492254e-10, -1.5974242277958657e-9, -1.0627675164823607e-8, -3.9917644153666690e-8, -9.0314698061707852e-8, -1.2161805302170486e-7, -7.8436151265538072e-8], [6.1718944439091459e-14, 3.9310041512168781e-12, 6.8554713621700121e-11, 5.4471142639422114e-10, 2.3498924876443441e-9, 5.9020508644342618e-9, 8.5419117827237783e-9, 5.7345229557318734e-9], [-1.4903746995813011e-15, -1.2856833856762893e-13, -2.7676417065797575e-12, -2.5836584366700006e-11, -1.2627603884146254e-10, -3.4826085182893276e-10, -5.3749541420202267e-10, -3.7394348134787591e-10], [3.5411996087761496e-17, 4.0487540802172312e-15, 1.0573488006560482e-13, 1.1429169347566499e-12, 6.2521290449908100e-12, 1.8752060785044936e-11, 3.0650123684943990e-11, 2.2010992911050145e-11], [-8.2905886990508163e-19, -1.2313620952210106e-16, -3.8406438768692478e-15, -4.7444249665315192e-14, -2.8734335789793326e-13, -9.2922885061218923e-13, -1.5986295124840755e-12, -1.1808960574317535e-12], [1.9135666454308551e-20, 3.6256916290698460e-18, 1.3314246229289216e-16, 1.8574504481058785e-15, 1.2333341404629844e-14, 4.2672966200494940e-14, 7.6848657024867961e-14, 5.8210946248633904e-14], [-4.3578481335064000e-22, -1.0348597081129794e-19, -4.4145832323133538e-18, -6.8786612501482338e-17, -4.9621955399177618e-16, -1.8239657537831822e-15, -3.4211986453688830e-15, -2.6498366309375210e-15]],
        [[1.6607779385690749e-1, 1.3191615335309586e-1, 8.4558742985813678e-2, 4.5181945126630450e-2, 2.1107476011908577e-2, 9.0922713048968353e-3, 3.6959654934505728e-3, 1.1982095368290833e-3], [-6.7623015390416924e-3, -1.2421483071348044e-2, -1.6908798957135647e-2, -1.5938836317249202e-2, -1.1346683368250875e-2, -6.6045860278175186e-3, -3.2665697217987056e-3, -1.1745378758500482e-3], [1.5599557275964334e-4, 5.9838589826629481e-4, 1.3025248293384137e-3, 1.8060086879427146e-3, 1.7771144370201821e-3, 1.3375521283894440e-3, 7.9479063468624903e-4, 3.1712775526633492e-4], [-3.7665481411920750e-6, -2.5513810683683335e-5, -8.2025185511763480e-5, -1.5777413239919806e-4, -2.0439314040593261e-4, -1.9208538657634110e-4, -1.3426293195453386e-4, -5.8858475506808157e-5], [9.1180575763685762e-8, 9.9334271941151030e-7, 4.5036968514170515e-6, 1.1522283433359724e-5, 1.8966643957299123e-5, 2.1647237338297792e-5, 1.7459306148984453e-5, 8.3208747959120122e-6], [-2.1795087665350995e-9, -3.6075397546022145e-8, -2.2256649877070582e-7, -7.3371966221684214e-7, -1.4930855719460946e-6, -2.0234102466704043e-6, -1.8520727256072110e-6, -9.5040564602745034e-7], [5.1161569941551981e-11, 1.2377209956331405e-9, 1.0095184205739987e-8, 4.1807801780535569e-8, 1.0284925227348683e-7, 1.6240531158696143e-7, 1.6630942394792465e-7, 9.1113953553193209e-8], [-1.1800691124982413e-12, -4.0455399127275946e-11, -4.2585410876776217e-10, -2.1690448163117515e-9, -6.3301692930980103e-9, -1.1461091173221442e-8, -1.2969136970253371e-8, -7.5293994028458360e-9], [2.6744723629144316e-14, 1.2673301968997607e-12, 1.6865439879154566e-11, 1.0374133908700361e-10, 3.5337590925069522e-10, 7.2343123459926200e-10, 8.9487686318104348e-10, 5.4696360733124694e-10], [-5.9713353123583964e-16, -3.8223022973684003e-14, -6.3151176769748157e-13, -4.6166772523510489e-12, -1.8094611281214480e-11, -4.1374742621532059e-11, -5.5419826703133947e-11, -3.5458173105998107e-11], [1.3124172681724392e-17, 1.1138007916621233e-15, 2.2478652714182290e-14, 1.9253456472449817e-13, 8.5732109939030132e-13, 2.1658786726794374e-12, 3.1152298844567277e-12, 2.0758900608791759e-12], [-2.8514729294586909e-19, -3.1444300943337722e-17, -7.6388683807552953e-16, -7.5675502773073410e-15, -3.7848127493462899e-14, -1.0462154501489582e-13, -1.6038831172398400e-13, -1.1081855004534614e-13], [6.1005512587339269e-21, 8.6200031136056658e-19, 2.4869368508845537e-17, 2.8162371127515326e-16, 1.5657360428287287e-15, 4.6944994091015095e-15, 7.6200030940355497e-15, 5.4375493159190272e-15], [-1.2905725727057794e-22, -2.2972629603006064e-20, -7.7720536698686443e-19, -9.9502041555881854e-18, -6.0905948271682775e-17, -1.9648302532833332e-16, -3.3563638980051832e-16, -2.4647070565610629e-16]],
        [[1.5367359207372208e-1, 1.1105093341508567e-1, 5.8729877708478512e-2, 2.3407674902879477e-2, 7.4192067098312332e-3, 2.0355325151174357e-3, 5.3360637508176612e-4, 1.2701932962916357e-4], [-5.6732590587145072e-3, -8.6348440402849753e-3, -9.4700279439241198e-3, -6.7715557442487991e-3, -3.4067762946753126e-3, -1.3335995200064120e-3, -4.4868676689815874e-4, -1.2277714544488894e-4], [1.1830096201714404e-4, 3.6811527918308907e-4, 6.3740492146369407e-4, 6.6758730298417779e-4, 4.7176756760549342e-4, 2.4711549563667848e-4, 1.0415417323154454e-4, 3.2674253231061481e-5], [-2.5993830675457932e-6, -1.4094809541129582e-5, -3.5588335504254083e-5, -5.1744455367624913e-5, -4.8872406079042613e-5, -3.2881240091927474e-5, -1.6882024698002048e-5, -5.9845128992729655e-6], [5.7619775582443492e-8, 4.9636053038394109e-7, 1.7537037747772013e-6, 3.4013936559596589e-6, 4.1402823799431033e-6, 3.4679019680213624e-6, 2.1173953461356885e-6, 8.3602725549880166e-7], [-1.2681908655668313e-9, -1.6400169078962938e-8, -7.8496342435570454e-8, -1.9704861874008485e-7, -3.0065587665917870e-7, -3.0581748372186996e-7, -2.1760429808644400e-7, -9.4477009677827734e-8], [2.7471525307128489e-11, 5.1445644057281365e-10, 3.2484123109122243e-9, 1.0302177406229222e-8, 1.9265234835026362e-8, 2.3312103710090824e-8, 1.9001584078239559e-8, 8.9709134168132466e-9], [-5.8708051793427359e-13, -1.5438839359846510e-11, -1.2578145696586298e-10, -4.9391653205940887e-10, -1.1107572011472641e-9, -1.5712228930635034e-9, -1.4455382094514068e-9, -7.3494403998900848e-10], [1.2312494785434580e-14, 4.4570384869807331e-13, 4.5965227368361376e-12, 2.1963298878538515e-11, 5.8434908056727670e-11, 9.5172449293469235e-11, 9.7568068311237872e-11, 5.2972244196967682e-11], [-2.5608947119839691e-16, -1.2428353782823786e-14, -1.5954947445007882e-13, -9.1359829660991545e-13, -2.8345118716409439e-12, -5.2449410008492229e-12, -5.9244857392313630e-12, -3.4096543157868169e-12], [5.2131955697636206e-18, 3.3584720577651135e-16, 5.2866193167696666e-15, 3.5783299993712090e-14, 1.2780835959645653e-13, 2.6551615770274754e-13, 3.2718644922561691e-13, 1.9832234380290212e-13], [-1.0518368209966621e-19, -8.8166347775641572e-18, -1.6787282926367677e-16, -1.3265856651665585e-15, -5.3916411914772389e-15, -1.2442300220613482e-14, -1.6579160298806826e-14, -1.0524208207364714e-14], [2.1491596982150050e-21, 2.2532573298865051e-19, 5.1248462542653164e-18, 4.6746905785976830e-17, 2.1391825403053472e-16, 5.4313069128893570e-16, 7.7642392102606006e-16, 5.1356840432562173e-16], [-3.9993024208507896e-23, -5.6132787527270858e-21, -1.5068976830132588e-19, -1.5696993498239679e-18, -8.0078453382126424e-18, -2.2170767570458408e-17, -3.3757511940616634e-17, -2.3161654851426326e-17]],
        [[1.4318462877389062e-1, 9.6271794060678121e-2, 4.3809077581298269e-2, 1.3738142528061146e-2, 3.0943436359987120e-3, 5.4572970405150297e-4, 8.7622680197830000e-5, 1.4099862209297105e-5], [-4.8376689169554758e-3, -6.2526602873622167e-3, -5.6987445290166337e-3, -3.2202940367524182e-3, -1.1865350052881961e-3, -3.1418743121012298e-4, -6.8841148883227238e-5, -1.3367686147035777e-5], [9.1905341932910410e-5, 2.3763537049916854e-4, 3.3793821557251163e-4, 2.7655498756854582e-4, 1.4389161040570065e-4, 5.2383651462695665e-5, 1.5028567856065929e-5, 3.4891795330682019e-6], [-1.8494388758410149e-6, -8.2287119595723017e-6, -1.6806995287921327e-5, -1.8999748149111625e-5, -1.3318017419285611e-5, -6.3731027184129654e-6, -2.3102028831643524e-6, -6.2802787924143862e-7], [3.7716178553719419e-8, 2.6367226312955526e-7, 7.4585907529545827e-7, 1.1228356443579285e-6, 1.0228112745313295e-6, 6.2208892925894833e-7, 2.7677719484688279e-7, 8.6391943427769636e-8], [-7.6888546019563812e-10, -7.9655191972119995e-9, -3.0315687882789821e-8, -5.9084973884758232e-8, -6.8072329610437623e-8, -5.1259044038715178e-8, -2.7332189990678815e-8, -9.6305460898713718e-9], [1.5405616774537393e-11, 2.2945399921713335e-10, 1.1468420652376559e-9, 2.8290514597579874e-9, 4.0329234602501799e-9, 3.6794281924076878e-9, 2.3046918739504667e-9, 9.0342797298635639e-10], [-3.0783629295283449e-13, -6.3458612303346811e-12, -4.0815280797410073e-11, -1.2506300192184543e-10, -2.1656001296799492e-10, -2.3503776233558202e-10, -1.7000458871756685e-10, -7.3216135503850886e-11], [5.9623267998035791e-15, 1.6940112195325995e-13, 1.3775117137570635e-12, 5.1579805814431484e-12, 1.0677077550412492e-11, 1.3567563076310620e-11, 1.1165146166718770e-11, 5.2261127816784130e-12], [-1.1576198079142741e-16, -4.3797439824736223e-15, -4.4343088550719576e-14, -2.0001937007538478e-13, -4.8801854078354824e-13, -7.1595128142899356e-13, -6.6165262352027669e-13, -3.3345187864640739e-13], [2.2869481671547528e-18, 1.1001898697268858e-16, 1.3677344055113891e-15, 7.3370317570296149e-15, 2.0834226851322227e-14, 3.4848512084644113e-14, 3.5753168396863654e-14, 1.9241776480506102e-14], [-3.7810458256466591e-20, -2.6928355435052068e-18, -4.0574220331803224e-17, -2.5580109794950753e-16, -8.3571695395396081e-16, -1.5758925178553777e-15, -1.7766025837459377e-15, -1.0137363669672171e-15], [8.6168382795513537e-22, 6.4225931239975103e-20, 1.1606752675463681e-18, 8.5091965044699939e-18, 3.1650590606654397e-17, 6.6598563109890017e-17, 8.1748544728318505e-17, 4.9143721089811106e-17], [-1.5862635512459907e-23, -1.4981699941728552e-21, -3.2080582020265665e-20, -2.7069373647328661e-19, -1.1350209006139765e-18, -2.6397041702893022e-18, -3.4983522211110040e-18, -2.2030277018252997e-18]],
        [[1.3418080026277750e-1, 8.5398573841830798e-2, 3.4594384360383269e-2, 8.9565447286967940e-3, 1.5111106873934013e-3, 1.7683339838709770e-4, 1.6851571141904076e-5, 1.6655117108112670e-6], [-4.1819917646095670e-3, -4.6852611485233216e-3, -3.6370857460327210e-3, -1.6850655102836766e-3, -4.7376114401288558e-4, -8.6914213528790460e-5, -1.2071675477228951e-5, -1.5360193458001924e-6], [7.2883267613872886e-5, 1.5977325054988615e-4, 1.9181183539472479e-4, 1.2670602813787959e-4, 5.0049947169955357e-5, 1.2833507133385269e-5, 2.4346474218954351e-6, 3.9038503425730952e-7], [-1.3514991609380586e-6, -5.0362301318185258e-6, -8.5429902693370243e-6, -7.7228405561106387e-6, -4.1155840765454802e-6, -1.4096860386400744e-6, -3.4996208228790998e-7, -6.8641214958638523e-8], [2.5434802078999739e-8, 1.4768060601108180e-7, 3.4284300455032783e-7, 4.1056330781789399e-7, 2.8512474078699063e-7, 1.2600724743560747e-7, 3.9587440557681091e-8, 9.2520847428384500e-9], [-4.8431216396902001e-10, -4.0984779978936422e-9, -1.2693176315050478e-8, -1.9622881018320019e-8, -1.7308884899654873e-8, -9.6112544441437410e-9, -3.7198377706349634e-9, -1.0132233751294596e-9], [8.9409317414809875e-12, 1.0889680900657639e-10, 4.4016347234279486e-10, 8.6007472072659510e-10, 9.4370006542405873e-10, 6.4422464366464814e-10, 3.0035234234962867e-10, 9.3579275355645906e-11], [-1.6870562136866552e-13, -2.7853767335074416e-12, -1.4426339853331258e-11, -3.5025979393811210e-11, -4.6978551481620431e-11, -3.8706092461674103e-11, -2.1326787870171350e-11, -7.4802405298096041e-12], [3.1308680910984569e-15, 6.8980510699606493e-14, 4.5032808819398168e-13, 1.3381312419745145e-12, 2.1607778937213271e-12, 2.1144205830171406e-12, 1.3542291469267513e-12, 5.2744398652179383e-13], [-4.8158716429652884e-17, -1.6604783251203669e-15, -1.3464810302113054e-14, -4.8302987464604258e-14, -9.2643140187520925e-14, -1.0614983844799706e-13, -7.7884483218106471e-14, -3.3287767762681075e-14], [1.2602443692671226e-18, 3.8777248118060545e-17, 3.8667015589349294e-16, 1.6562967654979217e-15, 3.7280305846157731e-15, 4.9382695947467695e-15, 4.0975872875395981e-15, 1.9021000829432969e-15], [-1.4849424543355635e-20, -8.8913137559271555e-19, -1.0724213914553194e-17, -5.4196864202269829e-17, -1.4157251690654468e-16, -2.1431076827319299e-16, -1.9879591973160001e-16, -9.9326485764025043e-17], [1.0304379335795082e-22, 1.9881811619490272e-20, 2.8762891137473780e-19, 1.6981511656516420e-18, 5.0960163648266185e-18, 8.7233766552809387e-18, 8.9527135574099233e-18, 4.7766035358660031e-18], [-1.4365043995229141e-23, -4.3090347045624470e-22, -7.4637862513225886e-21, -5.1054390854832606e-20, -1.7433337021815943e-19, -3.3413332207269015e-19, -3.7578502921004075e-19, -2.1257094477072519e-19]],
        [[1.2635296741143174e-1, 7.7139619193198093e-2, 2.8585174996538908e-2, 6.3695154249249860e-3, 8.4895244707960683e-4, 6.9249776553298075e-5, 3.9094576837557337e-6, 2.1429932998317112e-7], [-3.6575469321383579e-3, -3.6140677731309710e-3, -2.4355458769737209e-3, -9.5434243763210892e-4, -2.1343128227527011e-4, -2.8183315998440954e-5, -2.4732705344549054e-6, -1.8974197926932231e-7], [5.8821202746084318e-5, 1.1120780464614295e-4, 1.1537520178447417e-4, 6.3389026185700652e-5, 1.9644148804936829e-5, 3.6388521668134229e-6, 4.5140269107068995e-7, 4.6450998247839440e-8], [-1.0117930442250432e-6, -3.2097401455586610e-6, -4.6273230201933324e-6, -3.4352003904314498e-6, -1.4304070130843884e-6, -3.5695342526789637e-7, -5.9702949591420247e-8, -7.9100113496043515e-9], [1.7564635238714748e-8, 8.6617434347651110e-8, 1.6874110712283288e-7, 1.6463080184918064e-7, 8.9155930449835688e-8, 2.8950738422966798e-8, 6.2929604840903400e-9, 1.0374512602228946e-9], [-3.1637936265111407e-10, -2.2175645667968806e-9, -5.7083486150115609e-9, -7.1543981270031028e-9, -4.9220016228270551e-9, -2.0272287061531771e-9, -5.5641086971122798e-10, -1.1097975532017802e-10], [5.4211032668227259e-12, 5.4584663118033836e-11, 1.8202898762213254e-10, 2.8725333372900569e-10, 2.4618880902377980e-10, 1.2592028041449169e-10, 4.2608383022602992e-11, 1.0043715285819356e-11], [-8.7824326635894651e-14, -1.2975471786927977e-12, -5.5128441117202330e-12, -1.0780805003257154e-11, -1.1324840636646907e-11, -7.0655099611413920e-12, -2.8879818046698834e-12, -7.8872984109844772e-13], [2.1415434952641459e-15, 2.9766894220498889e-14, 1.5911501643429213e-13, 3.8128488165422605e-13, 4.8426309517835649e-13, 3.6284233214401337e-13, 1.7600353878389046e-13, 5.4754177096558780e-14], [-1.1877589623721044e-17, -6.7470401037530542e-16, -4.4392706362122113e-15, -1.2809360364235357e-14, -1.9408683370010276e-14, -1.7221951296779532e-14, -9.7597712743621559e-15, -3.4082567359287176e-15], [4.7252006044523841e-19, 1.4647670685089273e-17, 1.1877833758166103e-16, 4.1020401939784369e-16, 7.3355305630565714e-16, 7.6127333389606936e-16, 4.9703968011728281e-16, 1.9237335869593509e-16], [-2.5594836458215305e-20, -3.0958546253595932e-19, -3.0702999294134442e-18, -1.2578811072407670e-17, -2.6276266898258872e-17, -3.1530619064843463e-17, -2.3422187771997326e-17, -9.9357298261232551e-18], [-4.6194942425234602e-22, 6.7607749724680722e-21, 7.7768633351730289e-20, 3.7089465225997609e-19, 8.9570362117925662e-19, 1.2297343488583998e-18, 1.0275977205579682e-18, 4.7310365992205422e-19], [-3.8858497639865595e-24, -1.3437047356236681e-22, -1.8909799392070496e-21, -1.0519754483923401e-20, -2.9123614708081172e-20, -4.5296217294679993e-20, -4.2131988329271610e-20, -2.0867362648257928e-20]],
        [[1.1947307715558566e-1, 7.0693842541039203e-2, 2.4488759239424643e-2, 4.8631182337105150e-3, 5.3812331592696005e-4, 3.2470418094354783e-5, 1.1214030148884378e-6, 3.1071541965754125e-8], [-3.2312043646125456e-3, -2.8578755298712535e-3, -1.6961169546186554e-3, -5.7620620185557157e-4, -1.0651391637346720e-4, -1.0604701647534087e-5, -6.0205846042383603e-7, -2.5849731605889114e-8], [4.8178021091307465e-5, 7.9743523598844692e-5, 7.2925807667469444e-5, 3.4231907279033640e-5, 8.5961395174340177e-6, 1.1889663617619386e-6, 9.7329305501995557e-8, 5.9983056511120716e-9], [-7.7501148747536138e-7, -2.1181615946579593e-6, -2.6471802658894161e-6, -1.6535861762656086e-6, -5.5335705959430900e-7, -1.0325890150058193e-7, -1.1644771852369766e-8, -9.7703914278810657e-10], [1.2377549674920995e-8, 5.2897540931171490e-8, 8.8206242911163009e-8, 7.1690315751258425e-8, 3.1017281104702484e-8, 7.5460576315946535e-9, 1.1279234726218615e-9, 1.2347588497461413e-10], [-2.0836457254689397e-10, -1.2548391431477948e-9, -2.7370003907262621e-9, -2.8388021332958171e-9, -1.5553136665876290e-9, -4.8187528541920546e-10, -9.2732542143817633e-11, -1.2800730401741649e-11], [3.8684603593637499e-12, 2.8613566191158155e-11, 8.0205529248598749e-11, 1.0444689382932698e-10, 7.1234401931360791e-11, 2.7561437060063326e-11, 6.6653379928432857e-12, 1.1278362755257915e-12], [-2.5083679892397346e-14, -6.4236134359771537e-13, -2.2716433352197478e-12, -3.6247760787439177e-12, -3.0233770947542299e-12, -1.4356254482039664e-12, -4.2731980482571169e-13, -8.6544492644837137e-14], [1.7238469419111731e-15, 1.3455957844365605e-14, 6.0172784301794583e-14, 1.1851041929023448e-13, 1.1989600855215013e-13, 6.8902028011249255e-14, 2.4791479823575438e-14, 5.8883478600669434e-15], [-2.1792162114385994e-17, -2.8615062546664876e-16, -1.5659633397518014e-15, -3.7055562022614219e-15, -4.4810085755678589e-15, -3.0745992507335646e-15, -1.3158760877680886e-15, -3.6012412702684300e-16], [-1.0924143273472937e-18, 6.2273021543924559e-18, 4.0051422518931181e-17, 1.1114341609689250e-16, 1.5869149288324596e-16, 1.2843956378270613e-16, 6.4446334291940005e-17, 2.0012852565072742e-17], [-4.1318234754343389e-20, -1.0772782287410758e-19, -9.3536296108825917e-19, -3.1815670350367349e-18, -5.3457327144655856e-18, -5.0505945453928642e-18, -2.9324644438103978e-18, -1.0194512780742027e-18], [8.8122417042228143e-23, 2.3235990527660049e-21, 2.2539543745221131e-20, 8.8306622051357908e-20, 1.7208437701342382e-19, 1.8779563978766400e-19, 1.2467203569594770e-19, 4.7947915017433387e-20], [2.8893946486948698e-23, -5.4222225116219413e-23, -5.3431004389947640e-22, -2.3664785183523109e-21, -5.3026237564870776e-21, -6.6201517094127490e-21, -4.9691422132413963e-21, -2.0916617245427535e-21]],
        [[1.1336883003199722e-1, 6.5544584576508705e-2, 2.1593902861758464e-2, 3.9331136426535611e-3, 3.7754252764855040e-4, 1.7929289540882118e-5, 4.0332088959611587e-7, 5.3251417196984547e-9], [-2.8798987676075943e-3, -2.3089030894304527e-3, -1.2193572792285958e-3, -3.6579811836598691e-4, -5.7746561540737794e-5, -4.5491474125520410e-6, -1.7523175723369068e-7, -4.0167703597647258e-9], [3.9944537758326774e-5, 5.8681581423484665e-5, 4.8108882178314832e-5, 1.9760065008804034e-5, 4.1445915571004762e-6, 4.4382146500014566e-7, 2.4644825039138981e-8, 8.6312971871995512e-10], [-6.0540411281141317e-7, -1.4406096374001190e-6, -1.5874962027174065e-6, -8.5267202287661592e-7, -2.3557783661625406e-7, -3.3897593659766683e-8, -2.6239225816283423e-9, -1.3215688353144731e-10], [9.1095704757325350e-9, 3.3427822269028954e-8, 4.8501662820273883e-8, 3.3545492560601293e-8, 1.1887668902043498e-8, 2.2223098863672110e-9, 2.3049128163896686e-10, 1.5877245935143737e-11], [-1.1882545278121705e-10, -7.4328881312021284e-10, -1.4004836356309916e-9, -1.2196753387278712e-9, -5.4244458773863450e-10, -1.2886649101416704e-10, -1.7417976340076834e-11, -1.5780614314856369e-12], [3.7412631191577755e-12, 1.5404137274202029e-11, 3.6898691777856986e-11, 4.0825181237441773e-11, 2.2685659650176227e-11, 6.7525053898470232e-12, 1.1629909348521802e-12, 1.3418031105943759e-13], [5.8880063446052900e-15, -3.3620421541065131e-13, -1.0038079858434809e-12, -1.3226900592461567e-12, -8.8935012227886357e-13, -3.2507063708447970e-13, -6.9871787563687929e-14, -9.9885040221769008e-15], [-2.2278142131061814e-16, 6.7272834582710681e-15, 2.5007999169042708e-14, 4.0178024169929313e-14, 3.2685666773278748e-14, 1.4512745946189905e-14, 3.8265075769720307e-15, 6.6206057415017855e-16], [-9.3320121253222551e-17, -1.0807229497887150e-16, -5.4870277561429114e-16, -1.1489575669847116e-15, -1.1349605358939517e-15, -6.0588318615009059e-16, -1.9291490486794477e-16, -3.9581432631918784e-17], [-2.0464916661175646e-18, 3.0636398188825523e-18, 1.5121813734528077e-17, 3.2944152996921499e-17, 3.7688580351895568e-17, 2.3812508115128959e-17, 9.0226464800531674e-18, 2.1563378763568313e-18], [2.1066897383502025e-20, -5.3954038630856925e-20, -3.3050878252292945e-19, -8.8072402301405481e-19, -1.1911855558531151e-18, -8.8485799331573122e-19, -3.9389461562746780e-19, -1.0793765834275493e-19], [2.9910467413070499e-21, 5.7124671493947408e-23, 5.4728802387893788e-21, 2.2341647908620776e-20, 3.6068644459475451e-20, 3.1224164184778704e-20, 1.6132904084021583e-20, 4.9985370030798261e-21], [8.1329935570807335e-23, -3.6449997884361519e-23, -1.9708954024562431e-22, -5.9101390684170332e-22, -1.0541804369273704e-21, -1.0489022057292458e-21, -6.2176741503465919e-22, -2.1507191243490015e-22]],
        [[1.0790723342565514e-1, 6.1347234735609340e-2, 1.9487815028238753e-2, 3.3326001996069118e-3, 2.8809281711478537e-4, 1.1419533738687717e-5, 1.8177025017738414e-7, 1.1479643799467130e-9], [-2.5870729123596824e-3, -1.9005208780683212e-3, -8.9935125387624568e-4, -2.4108287991493783e-4, -3.3331254674337233e-5, -2.1721248109453970e-6, -6.0467187544625330e-8, -7.4036048254927112e-10], [3.3491607102445671e-5, 4.4170055902514393e-5, 3.2923996476532612e-5, 1.2086801665812578e-5, 2.1777881799217775e-6, 1.8722336572160392e-7, 7.3431282127265181e-9, 1.4286772902573000e-10], [-4.7378747319218657e-7, -1.0074053736888336e-6, -9.9555831419887143e-7, -4.6824741382417348e-7, -1.0932269120764857e-7, -1.2510376008975839e-8, -6.8567226658114189e-10, -2.0090996316086307e-11], [7.6252297811114137e-9, 2.1609694026579262e-8, 2.7474064058845968e-8, 1.6566766553124289e-8, 4.9479961086812377e-9, 7.3303640739296919e-10, 5.4009612018744385e-11, 2.2543105956348130e-12], [-3.1430977569710071e-11, -4.6509537188493629e-10, -7.7648226873716976e-10, -5.6972114593561414e-10, -2.0804254331563906e-10, -3.8626289873283042e-11, -3.7154084152950232e-12, -2.1180337702769979e-13], [3.2141636225888932e-12, 8.5602419900344503e-12, 1.7710656089945404e-11, 1.7022184436596024e-11, 7.8867707662586618e-12, 1.8450243740856321e-12, 2.2823946271564968e-13, 1.7181517145611891e-14], [-6.5852235032860236e-14, -1.6437127941388550e-13, -4.2799105808392810e-13, -5.0510391241938598e-13, -2.8466664330191337e-13, -8.1815456620055578e-14, -1.2739601792857698e-14, -1.2290732495202775e-15], [-4.3421569455436194e-15, 4.4345258400177410e-15, 1.3111227130374868e-14, 1.5415581873993925e-14, 9.8433918419494574e-15, 3.3927446906487710e-15, 6.5332099906730301e-16, 7.8738080861670721e-17], [-1.0055530939182298e-16, -3.7817046737685703e-17, -1.8765593457897643e-16, -3.7632155128046727e-16, -3.1306785855179855e-16, -1.3181403224187013e-16, -3.1045741085181413e-17, -4.5711254186413858e-18], [3.3095158954869175e-18, 2.3726197519827499e-19, 3.5198035289638217e-18, 9.7592033867099882e-18, 9.7039226224633370e-18, 4.8571557429189168e-18, 1.3769155288092635e-18, 2.4275438737348179e-19], [2.3559871541615265e-19, -8.0093499090707325e-20, -2.4092543585452164e-19, -3.0387485657391266e-19, -2.9469608890830043e-19, -1.7019113620128108e-19, -5.7294837855026022e-20, -1.1883124666855603e-20], [4.0843855550546772e-21, -5.1090683090477683e-22, 1.3598266357946552e-22, 5.5309824139496770e-21, 8.1440125641101201e-21, 5.6650034918921617e-21, 2.2467081243221942e-21, 5.3960056752349144e-22], [-1.4810760625245095e-22, 3.9893151896369379e-23, 3.0358113622498604e-23, -1.2996049942284534e-22, -2.2579511282686124e-22, -1.8083312663933436e-22, -8.3257659821318602e-23, -2.2818532410821659e-23]],
        [[1.0298446359045801e-1, 5.7864996662774771e-2, 1.7919254342567068e-2, 2.9320238234781070e-3, 2.3547510527586064e-4, 8.2076426070931890e-6, 1.0110436609627579e-7, 3.3292949219195733e-10], [-2.3398327057615828e-3, -1.5902791295594315e-3, -6.7732036806865968e-4, -1.6310023514823556e-4, -2.0071239805585540e-5, -1.1216628991314953e-6, -2.4123802020978792e-8, -1.6747058047408958e-10], [2.8528551370715549e-5, 3.3881299963340106e-5, 2.3167895976227853e-5, 7.7430981923509677e-6, 1.2308198522415138e-6, 8.8072990201490567e-8, 2.5600089955242032e-9, 2.8112729439543277e-11], [-3.5356048544444567e-7, -7.2619613131670765e-7, -6.6041167846739822e-7, -2.7608180420119775e-7, -5.5338190852790949e-8, -5.1596264729098405e-9, -2.0741027469947756e-10, -3.5300549255835940e-12], [7.5283802683178767e-9, 1.4066667731233106e-8, 1.5444739265612488e-8, 8.3550055315302192e-9, 2.1821534464599183e-9, 2.6648335259625504e-10, 1.4485354188610485e-11, 3.6210211381411865e-13], [5.9904198761801804e-12, -3.0020751582995812e-10, -4.5359440585626161e-10, -2.8555673675402044e-10, -8.7071474787821636e-11, -1.2902238250625076e-11, -9.0281195750636612e-13, -3.1618170351292395e-14], [-8.1039779117365260e-13, 5.7128992671862046e-12, 1.0662139956623448e-11, 8.1545193981294063e-12, 3.0466208213413154e-12, 5.6202534492819630e-13, 5.0619803146271050e-14, 2.4123382274230587e-15], [-2.1533538822020029e-13, -4.9247647842509483e-14, -1.0926665157616601e-13, -1.7535157154451150e-13, -9.4943626345944205e-14, -2.2619576849061425e-14, -2.6025019922895622e-15, -1.6387577910805925e-16], [-2.9173621942287395e-15, 2.4229126149036918e-15, 6.4915888180775943e-15, 6.2752600508537926e-15, 3.2423957760162250e-15, 8.7918047734070300e-16, 1.2426914531987432e-16, 1.0046685427981696e-17], [2.4362420504306657e-16, -9.2307697397236914e-17, -2.3561452518270761e-16, -1.8836078061038528e-16, -1.0038355517052003e-16, -3.1860458368157009e-17, -5.5268156000865313e-18, -5.6160067554794203e-19], [1.2119936655178949e-17, -2.3328834963819201e-18, -4.4635696389234288e-18, 1.1651715713418400e-18, 2.4517037164836433e-18, 1.0767147271049139e-18, 2.3067216149025517e-19, 2.8864544097776599e-20], [-3.0736872144973724e-20, 1.0538146998151450e-20, -2.7847186105245875e-20, -8.5133267580817909e-20, -7.8340893461158327e-20, -3.6026435748387772e-20, -9.1031522199651631e-21, -1.3733219144861182e-21], [-1.9500270110915224e-20, 5.1106776207931599e-21, 1.1401546688209762e-20, 5.4738769846132965e-21, 2.4679583906790912e-21, 1.1417838393871051e-21, 3.3964740118507161e-22, 6.0824419722492566e-23], [-5.5609964808256560e-22, 1.1290288938784255e-22, 2.8896019857109291e-22, 7.4730517488237418e-23, -3.6498626954643220e-23, -3.3098431921254907e-23, -1.2014912779599708e-23, -2.5164310849697782e-24]],
        [[9.8521032019732518e-2, 5.4930322698683108e-2, 1.6727426560145120e-2, 2.6586343510772528e-3, 2.0342201502135013e-4, 6.5135338884277812e-6, 6.7542592641734497e-8, 1.3594325954268205e-10], [-2.1265357331038817e-3, -1.3506697678357336e-3, -5.2007895866359068e-4, -1.1250667724805960e-4, -1.2397668080429481e-5, -6.0798393675919763e-7, -1.0699616105929032e-8, -4.6875516584213929e-11], [2.5003310118400340e-5, 2.6342342028941309e-5, 1.6469247780485587e-5, 5.0744254428269058e-6, 7.2960615944926357e-7, 4.5122996332576447e-8, 1.0272916621652291e-9, 6.7471827776762119e-12], [-2.3531066171180547e-7, -5.4206913122165476e-7, -4.7269704169365527e-7, -1.7879632089190889e-7, -3.1112510651107663e-8, -2.3966748434420551e-9, -7.2631803579774341e-11, -7.3533184282996191e-13], [6.9561436269770412e-9, 9.3521505081215287e-9, 8.7679088984008613e-9, 4.2947947000266799e-9, 1.0050346594663197e-9, 1.0483501602453160e-10, 4.3995043114747545e-12, 6.7268066197548434e-14], [-8.5326421000526130e-11, -1.7448840870104398e-10, -2.1987075429807152e-10, -1.3210887748632026e-10, -3.6923399310362173e-11, -4.6592823884074168e-12, -2.4836437369657256e-13, -5.3647724402136788e-15], [-6.2701375526588944e-12, 4.8200500044226069e-12, 9.0300986633815167e-12, 5.0827636541428314e-12, 1.4026708145408486e-12, 1.9529024660993200e-13, 1.2769626913146479e-14, 3.7898908932703555e-16], [-9.6649262934250617e-14, -3.7232639377871670e-14, -6.3061205345614357e-14, -7.6369945788315069e-14, -3.4964610975154624e-14, -6.8605525645631675e-15, -5.9548559726395417e-16, -2.4099206558058868e-17], [1.1312021575914449e-14, -1.7474763889049043e-15, -3.8102886511428975e-15, 1.9284347620954726e-16, 8.3997816933551652e-16, 2.3734520894069282e-16, 2.6266514568162083e-17, 1.3976949306756598e-18], [3.7865239937174111e-16, -9.8549482201975368e-17, -2.5354357754652967e-16, -1.3329258562638038e-16, -4.1840533341491530e-17, -8.9131939233286388e-18, -1.1011372434139203e-18, -7.4494708913660484e-20], [-1.2607624613884590e-17, 3.6056091969347703e-18, 7.7161007618152558e-18, 3.4822219112702961e-18, 1.0730184175800510e-18, 2.7473755734253267e-19, 4.2709314093684342e-20, 3.6714840118262417e-21], [-9.2063256109870745e-19, 2.0375291623732722e-19, 4.8554084408407593e-19, 1.5586101761434118e-19, 2.6756069751656131e-21, -7.0836118060169793e-21, -1.5707797990239490e-21, -1.6849170394503395e-22], [3.6732314578786958e-21, -2.0131731208430262e-21, -1.5047669479182283e-21, 6.7088807550721168e-22, 7.0841826835581321e-22, 2.6392384239229692e-22, 5.6617924720735721e-23, 7.2347238063146964e-24], [1.6931931743646694e-21, -4.0401089657000685e-22, -9.2753815252369898e-22, -3.3891922440736635e-22, -5.4406445837316335e-23, -8.7052902301484895e-24, -1.9050957476508891e-24, -2.9105307154902243e-25]],
        [[9.4460261092084042e-2, 5.2420768356913061e-2, 1.5802568863794446e-2, 2.4681392242338767e-3, 1.8344380045298441e-4, 5.5838112143925284e-6, 5.2251855916298892e-8, 7.7264203877917603e-11], [-1.9360960724516563e-3, -1.1636332808941878e-3, -4.0889154138607751e-4, -7.9486777326103661e-5, -7.8265734534870613e-6, -3.3922557560306185e-7, -5.0628147416770036e-9, -1.5696547008592232e-11], [2.2764085216219496e-5, 2.0639208081694429e-5, 1.1529214581216450e-5, 3.2733911226304211e-6, 4.3348396861965317e-7, 2.4028582577553453e-8, 4.5587303769948356e-10, 1.9795796119965314e-12], [-1.4591195296998560e-7, -4.1456489430620285e-7, -3.5674246129795402e-7, -1.2534847107316587e-7, -1.9403668953784140e-8, -1.2631629275649507e-9, -2.9661687856101702e-11, -1.8573065295466136e-13], [3.7721205521200140e-9, 6.8929968178407836e-9, 6.2984359904516654e-9, 2.6885566033089759e-9, 5.3481151549658933e-10, 4.6373805112141118e-11, 1.5160556624584416e-12, 1.4671627168728031e-14], [-2.1997554617765240e-10, -7.9560235871132593e-11, -4.3513836764207302e-11, -3.8255424419935241e-11, -1.3055291772214985e-11, -1.6517401318149147e-12, -7.4473257215943748e-14, -1.0484040487277453e-15], [-2.9398954154405699e-12, 2.7401080664240328e-12, 4.8143971014694802e-12, 2.5697814966300991e-12, 6.3497446118432496e-13, 7.3714458566892347e-14, 3.6567107861789421e-15, 6.8007403683739548e-17], [3.2313259082456872e-13, -1.0919817215517165e-13, -2.3817354099785724e-13, -1.0884416682476429e-13, -2.3512788184640863e-14, -2.7248774779126660e-15, -1.5826414097026534e-16, -3.9873357202117422e-18], [8.9094225032628570e-15, -1.3160899055663344e-15, -3.7097560830579899e-15, -8.4727725274331917e-16, 1.4683993479502597e-16, 6.2512782720306120e-17, 6.0062249050730240e-18, 2.1488861880599119e-19], [-5.7531983141804945e-16, 1.2893000498565447e-16, 2.9134274229074136e-16, 8.7509347511256481e-17, 2.8224424619743335e-18, -1.8360044366405697e-18, -2.3458141225454451e-19, -1.0826120899824956e-20], [-2.0391512809847085e-17, 4.2717894653654524e-18, 1.1599124442158256e-17, 4.8672520074421025e-18, 9.1580951513370761e-19, 1.0777263837595718e-19, 9.3775756411545598e-21, 5.0884236148992983e-22], [9.5257274220223552e-19, -2.3917574603318380e-19, -5.2437766543179521e-19, -1.8695907270045933e-19, -2.7532746382833125e-20, -2.8469330123125684e-21, -3.0914619276485948e-22, -2.2219905995457082e-23], [4.4636873788880207e-20, -8.8652853252800066e-21, -2.4420881095485680e-20, -9.4706126202132815e-21, -1.2704698318852671e-21, -2.2221445606238556e-23, 8.7699775703406524e-24, 9.1369532361291480e-25], [-1.4866953208980058e-21, 3.9524954101745916e-22, 8.0154014440397004e-22, 2.5529412897535923e-22, 2.3399250799054647e-23, -8.9610655413992736e-25, -3.3300891956313840e-25, -3.5811378341365306e-26]],
        [[9.0765135265934439e-2, 5.0244117122295947e-2, 1.5064647517278339e-2, 2.3310779633417896e-3, 1.7061352801948768e-4, 5.0571607610829271e-6, 4.4878258123284592e-8, 5.6690804371276956e-11], [-1.7603037585627501e-3, -1.0166468486915447e-3, -3.3210538060851248e-4, -5.8626673578769327e-5, -5.1601359026409072e-6, -1.9701542880412024e-7, -2.5156191150226675e-9, -5.9460336708882946e-12], [2.1226854277102059e-5, 1.6282309376302742e-5, 7.8381095468125906e-6, 2.0100537557240737e-6, 2.4546542622903357e-7, 1.2481432177580577e-8, 2.0841623396516981e-10, 6.7668482324921534e-13], [-1.2121275093648940e-7, -3.1449682620283846e-7, -2.5901566141312277e-7, -8.6146200001320154e-8, -1.2318701069772916e-8, -7.1175110961187330e-10, -1.3747099128868053e-11, -5.7559234004098291e-14], [-5.2731506646527749e-10, 5.7077507987220298e-9, 6.0224951940176823e-9, 2.2931410069294121e-9, 3.7660087771814486e-10, 2.5847405506628954e-11, 6.3201580407772639e-13, 3.8616840224065954e-15], [-1.7200078612340916e-10, -5.0374336782558301e-11, -9.8968590508545555e-12, -1.2467369440975125e-11, -4.9124775480961005e-12, -6.0979916290173507e-13, -2.3935280183860372e-14, -2.3483017963115072e-16], [6.4579977948682981e-12, -1.1431349482661574e-13, -1.6285319513802120e-12, -2.3619317210140835e-13, 9.0485848886077487e-14, 1.9924941410947259e-14, 1.0369071559165955e-15, 1.3858710326103594e-17], [2.2359892267758802e-13, -6.8408532655890751e-14, -1.5685679155258098e-13, -6.9138298335038324e-14, -1.3220993494742850e-14, -1.2086802516263626e-15, -4.9806265108588227e-17, -7.6424168835954620e-19], [-1.3501370479533349e-14, 3.4056552865401042e-15, 7.9830620891648190e-15, 3.1515227576003461e-15, 5.1683646233707037e-16, 4.2140704886193522e-17, 1.8499980531208215e-18, 3.7738526370615265e-20], [-3.2011229145402332e-16, 5.7544034034557293e-17, 1.6542177813102733e-16, 6.0561840741319110e-17, 6.5439103497906861e-18, -1.3955905727838743e-19, -4.7300909070751137e-20, -1.7145015244276759e-21], [2.8437019627055172e-17, -6.3527574991765755e-18, -1.5348080958563685e-17, -5.4896412142052883e-18, -6.5873974449349501e-19, -1.4800537051347249e-20, 1.5091587282742132e-21, 7.6136580665752568e-23], [3.6685939280355140e-19, -5.5226727574365800e-20, -2.0739457823897275e-19, -9.5528526782874944e-20, -1.7966540888897606e-20, -1.6260361714891422e-21, -8.7316632267797028e-23, -3.2890922180140250e-24], [-5.6654480119193781e-20, 1.2440485169248756e-20, 3.1050091147681748e-20, 1.1645389586468662e-20, 1.6316437347357699e-21, 9.3964771132374356e-23, 3.1824556858514039e-24, 1.2876867611581827e-25], [-2.2869871461816615e-22, -1.7322479021126113e-23, 1.3337024197693264e-22, 8.7927181047684312e-23, 1.9363556549053945e-23, 1.3356244020688684e-24, -1.6987327916034303e-26, -4.4949815561811782e-27]],
        [[8.7409501550594094e-2, 4.8330174407438685e-2, 1.4454433553551150e-2, 2.2270565495456235e-3, 1.6185643944279061e-4, 4.7403643979604706e-6, 4.1093676960195146e-8, 4.8587780248704425e-11], [-1.5966505290875774e-3, -9.0001155111032965e-4, -2.8022916628872404e-4, -4.6080870685897102e-5, -3.6924595886448975e-6, -1.2510199388837034e-7, -1.3657646497143875e-9, -2.5127317650170026e-12], [1.9638998386300932e-5, 1.3021334687662534e-5, 5.2919091611529479e-6, 1.1859352333653271e-6, 1.3067392291655518e-7, 6.0783798898609164e-9, 9.1663386847668710e-11, 2.4501481516373397e-13], [-1.4755712697099420e-7, -2.3180389374564820e-7, -1.6730829874153256e-7, -5.2201398048315249e-8, -7.0524616432159519e-9, -3.7866055964940077e-10, -6.4833880903941208e-12, -2.0662425609776204e-14], [-2.1791436169676924e-9, 4.5832042852619894e-9, 5.2349948211687848e-9, 1.8920875501615198e-9, 2.7995364610571527e-10, 1.6438261972588465e-11, 3.1815763678059270e-13, 1.2798367646014732e-15], [6.4457178066038127e-12, -6.3567691354376037e-11, -7.1535289615444203e-11, -2.9499162722606541e-11, -5.2913321877161201e-12, -3.9603914054641515e-13, -1.0391123213874921e-14, -6.3959924616642224e-17], [6.4663776171610539e-12, -5.2335321181769063e-13, -2.3765325293821708e-12, -7.3601031930961276e-13, -5.1289317447700706e-14, 2.9744429332405563e-15, 2.6696665260565074e-16, 3.0575537332640609e-18], [-1.8535439583184891e-13, 2.9110890944863809e-14, 8.1511634119328135e-14, 2.5205570741309478e-14, 1.7906050097028308e-15, -1.1551988902726868e-16, -1.1254143281634330e-17, -1.5703185044753470e-19], [-7.0532898686144307e-15, 1.6548519294536313e-15, 4.2007792002531743e-15, 1.7219877463038934e-15, 2.8520230483716114e-16, 2.1022149940178439e-17, 6.7309724871699560e-19, 7.9187248873349353e-21], [4.8409383079796401e-16, -1.0935850200816734e-16, -2.7030753737590709e-16, -1.0300313258804128e-16, -1.5023101007644014e-17, -9.1891388417535500e-19, -2.5354739372198130e-20, -3.4094805545037264e-22], [2.0258808376903182e-18, -1.3950612678498365e-19, -1.0541602716457451e-18, -4.9814181387224011e-19, -7.6719323944252108e-20, -1.7304539846547353e-21, 3.0265234896314873e-22, 1.2315126623255685e-23], [-9.1090941349231020e-19, 1.9091506750665849e-19, 4.9807691270614479e-19, 1.8970899764131587e-19, 2.6398590188452399e-20, 1.2761528093374457e-21, 8.4348321752026838e-24, -4.4137375797584921e-25], [1.6281861403459732e-20, -3.9979865918453277e-21, -8.8270052283374147e-21, -3.0198899158767781e-21, -3.4733547536236605e-22, -9.6692696661531028e-24, 3.5032472951604105e-25, 1.9057075224041969e-26], [1.2672103270328250e-21, -2.4330956993943726e-22, -6.9834761856999936e-22, -2.8132837132663377e-22, -4.3004165521874913e-23, -2.5915567484560757e-24, -5.8871956211054380e-26, -8.2821849382106016e-28]],
        [[8.4367321833844531e-2, 4.6626327930625477e-2, 1.3930876320221895e-2, 2.1427293421802815e-3, 1.5529717730893310e-4, 4.5271727389050076e-6, 3.8900946198066059e-8, 4.4931693727221686e-11], [-1.4471593580996581e-3, -8.0582022798674822e-4, -2.4462506662948599e-4, -3.8633984894657299e-5, -2.9177781188576941e-6, -9.0757460606886427e-8, -8.7104274841351337e-10, -1.2733582608334870e-12], [1.7685193237856316e-5, 1.0636429390977307e-5, 3.7320521293024560e-6, 7.1941262066327835e-7, 6.9288607254218878e-8, 2.8631648727427962e-9, 3.8466423477396019e-11, 8.7526075178238456e-14], [-1.7498479200815779e-7, -1.6898537573529335e-7, -9.7154578972750346e-8, -2.7298107390576863e-8, -3.4573155108628315e-9, -1.7524496832912864e-10, -2.7805041417028514e-12, -7.5291402177840525e-15], [-9.8537526594714807e-10, 3.2686988284816563e-9, 3.4609513165248967e-9, 1.2008735295253608e-9, 1.6916682243058385e-10, 9.2384910025605501e-12, 1.5824668376532620e-13, 4.8817677967247844e-16], [8.8925458152114321e-11, -6.3712170616828334e-11, -9.4405690737002524e-11, -3.5696037696279375e-11, -5.3628398960674413e-12, -3.1614207199316015e-13, -6.0729595076885979e-15, -2.3366109374577031e-17], [4.8866323797677393e-13, 5.0723379996502682e-13, 4.6345716465963564e-13, 2.3215035910062097e-13, 5.1826815167109813e-14, 4.6236155729926566e-15, 1.3701210052837190e-16, 8.7867370791867577e-19], [-1.7528901585339395e-13, 2.9982423931283885e-14, 8.4230158719355038e-14, 2.9546773938804493e-14, 3.4334480889379985e-15, 1.0246630835462630e-16, -1.2937666172027217e-18, -3.1655096887692334e-20], [5.2410991862004016e-15, -1.0452885285571846e-15, -2.6815270389938053e-15, -9.4669425262901313e-16, -1.1167894359768977e-16, -3.3261991707072995e-18, 5.5914420222868615e-20, 1.4454256890493701e-21], [1.0839450089254848e-16, -2.3368209120908374e-17, -6.2468439910434218e-17, -2.5512740931261738e-17, -4.1246772576002670e-18, -2.8515245488920949e-19, -8.0048244683352416e-21, -7.5095402446316521e-23], [-1.1984951037205224e-17, 2.5682478986546284e-18, 6.6140109185044666e-18, 2.5369502577060579e-18, 3.6551164081146104e-19, 2.0599096779682664e-20, 4.2532301086743088e-22, 3.2480163675123187e-24], [2.1337185350252505e-19, -4.8858991735233058e-20, -1.1719772726281305e-19, -4.3109487642727396e-20, -5.8719995731869736e-21, -3.1487745363383565e-22, -7.3073617302785646e-24, -9.8281525185020258e-26], [1.2378044240742313e-20, -2.4265731774786807e-21, -6.8013240127554149e-21, -2.6962967721059709e-21, -3.9887035822235042e-22, -2.1810463320619032e-23, -3.0340740073090912e-25, 1.9150264865541576e-27], [-7.4067188568777754e-22, 1.5478851102613527e-22, 4.0611414389004799e-22, 1.5587495757735365e-22, 2.2166052166784503e-23, 1.1663514697757847e-24, 1.6998209207301120e-26, -4.4988846794082680e-29]],
        [[8.1607733576567969e-2, 4.5093924612835713e-2, 1.3468365090494350e-2, 2.0703760755293265e-3, 1.4991201431436279e-4, 4.3633877864229269e-6, 3.7385928686831121e-8, 4.2873347548545404e-11], [-1.3142126246231621e-3, -7.2804242508443696e-4, -2.1862703254274121e-4, -3.3913519512432316e-5, -2.4909901155329684e-6, -7.4188700847721459e-8, -6.6185768011319145e-10, -8.3103921556451049e-13], [1.5547839416506005e-5, 8.8830991549183922e-6, 2.8398429308843894e-6, 4.8514915234322324e-7, 4.0790024096829910e-8, 1.4599758437017425e-9, 1.6832356357302061e-11, 3.1679329568138895e-14], [-1.7719513884429210e-7, -1.2600526130927634e-7, -5.5663634735326995e-8, -1.3277985512948557e-8, -1.5165915553445955e-9, -7.1296092602609830e-11, -1.0526478902947824e-12, -2.5430909509901601e-15], [6.1588346067601868e-10, 2.1635360523835558e-9, 1.8218157348910237e-9, 5.9056198216675943e-10, 7.9781311632319209e-11, 4.1731785659774209e-12, 6.7019602492871228e-14, 1.7902300108259050e-16], [6.1579337488570085e-11, -4.5439340136086361e-11, -6.5245339393768889e-11, -2.3886584084425714e-11, -3.4219832045753735e-12, -1.8746449740672225e-13, -3.1845569809001259e-15, -9.4716027025638499e-18], [-2.0084078806725273e-12, 8.6339081025181651e-13, 1.5717944262182795e-12, 6.0882531243784964e-13, 9.1805418667380476e-14, 5.3809530867766520e-15, 1.0155538051084131e-16, 3.7029515803171365e-19], [-1.3809606013945262e-14, -2.3316007899546999e-15, 3.9334769059345295e-16, -7.9067524889077640e-16, -3.8495764015937379e-16, -4.6600019852921311e-17, -1.5943404941227970e-18, -1.0623149603127499e-20], [3.4964351352478620e-15, -6.8820662774520317e-16, -1.8071213697690701e-15, -6.5705277372901821e-16, -8.3865245217150065e-17, -3.4730019573226801e-18, -2.0857206801901458e-20, 2.5038184821717254e-22], [-1.2230615293379388e-16, 2.5464947998374885e-17, 6.5407600056092117e-17, 2.4188230042213045e-17, 3.1914507757346543e-18, 1.4152969122944299e-19, 1.1464718382203937e-21, -8.9383674788503985e-24], [-8.2684062762236068e-20, 1.5481029240545735e-20, 7.0326529012892143e-20, 4.4117983563955690e-20, 1.1403578263318697e-20, 1.2497836145151168e-21, 5.0783859737330905e-23, 5.5677464240316781e-25], [1.7564305741270974e-19, -3.6737966514765550e-20, -9.6720841551303447e-20, -3.7388931729985556e-20, -5.4119032580914929e-21, -3.0090855809212783e-22, -5.6417351316619193e-24, -2.9762835513123746e-26], [-6.7370745195016458e-21, 1.4219084210618053e-21, 3.6992737786754059e-21, 1.4170053972921368e-21, 2.0202016372065116e-22, 1.0941832355137741e-23, 1.9696642842146080e-25, 1.0505932229766953e-27], [1.7142652543060232e-23, -5.1484867942514790e-24, -9.2431484976711014e-24, -2.7185052341964227e-24, -2.4583455204175369e-25, -7.5365242379539730e-27, -4.9510198144102931e-28, -1.8693169172632665e-29]],
        [[7.8407800198132589e-2, 4.3323443633773339e-2, 1.2938105472463950e-2, 1.9884852286324892e-3, 1.4393881679429726e-4, 4.1874629040639592e-6, 3.5846752170084603e-8, 4.1022467831150544e-11], [-1.8672829512689466e-3, -1.0323298395837335e-3, -3.0866459073566136e-4, -4.7534598454623928e-5, -3.4517587902576695e-6, -1.0093005137476775e-7, -8.7175203688706017e-10, -1.0177025939567637e-12], [3.3172400910635158e-5, 1.8485626178410767e-5, 5.6202880522229910e-6, 8.8957142523195053e-7, 6.7359470823433272e-8, 2.0998137902076387e-9, 2.0124661838593788e-11, 2.8755814048507193e-14], [-6.2733381374839096e-7, -3.7351937113250836e-7, -1.2871904089310146e-7, -2.4238181575797094e-8, -2.2705072203439830e-9, -9.0682422092897997e-11, -1.1602995713076194e-12, -2.3867423199681859e-15], [9.4991641006495959e-9, 8.5290538473834527e-9, 4.6475279778881273e-9, 1.2619964102975551e-9, 1.5530616869341593e-10, 7.6105499920977192e-12, 1.1443402378391048e-13, 2.7309021254219601e-16], [9.1724814519409469e-11, -2.4360415872704673e-10, -2.6190510939024578e-10, -8.9922680566967274e-11, -1.2374539041851140e-11, -6.4870460808903476e-13, -1.0294593932940312e-14, -2.6316129046341958e-17], [-1.8936027688425132e-11, 8.7387511679458715e-12, 1.5028200181538300e-11, 5.6072060765511318e-12, 8.0226074450833861e-13, 4.3400708287600539e-14, 7.1649836431027821e-16, 1.9776264195627996e-18], [9.5311679142204283e-13, -2.9503979669590280e-13, -6.2685532709688624e-13, -2.4291481585238827e-13, -3.5877494222363098e-14, -2.0232367557150906e-15, -3.5692747703207616e-17, -1.1279497042954530e-19], [-1.1857034847080623e-14, 4.0334326869863630e-15, 8.8913299492124484e-15, 3.8135305185109185e-15, 6.4889503503529042e-16, 4.4108087875745622e-17, 9.9853954222715460e-19, 4.5668785999989096e-21], [-2.0325795340812249e-15, 4.1300989763967520e-16, 1.0596218724708045e-15, 3.8363205198523046e-16, 4.8828478998534283e-17, 2.0323122469503039e-18, 1.3970474043609670e-20, -1.0469285395742229e-22], [1.8117580963334618e-16, -3.8053695567964153e-17, -9.8149859785057008e-17, -3.6858439288234122e-17, -5.0283229353233472e-18, -2.4349914172471617e-19, -3.0217520311278339e-21, -2.6551603278099657e-27], [-6.6736570006124070e-18, 1.3922612633831059e-18, 3.6359526247710789e-18, 1.3800603660735167e-18, 1.9123109503525821e-19, 9.4722127819288085e-21, 1.2072422655273962e-22, -4.5192686353554276e-26], [-7.1427528846151294e-20, 1.5355364845798562e-20, 3.9712423299229434e-20, 1.5413651231916152e-20, 2.2807861456893503e-21, 1.3609185594731360e-22, 3.0920854954996223e-24, 2.3244895341034079e-26], [2.4326236156238981e-20, -5.0554561671351908e-21, -1.3365247052298402e-20, -5.1580258854408792e-21, -7.4054392113521280e-22, -4.0025418170125552e-23, -6.7975434264749938e-25, -2.5111872509636448e-27]],
        [[7.4916614058485231e-2, 4.1393907688872232e-2, 1.2361541235264560e-2, 1.8997874643821124e-3, 1.3750868742996199e-4, 3.9999476655030768e-6, 3.4234762790244168e-8, 3.9160408146278210e-11], [-1.6294128917920218e-3, -9.0036262107135047e-4, -2.6891380872037592e-4, -4.1337523763709279e-5, -2.9931216474530251e-6, -8.7115118548973070e-8, -7.4632251377492535e-10, -8.5546340915005666e-13], [2.6558696025643210e-5, 1.4691493109398168e-5, 4.3980925275682576e-6, 6.7867746498656625e-7, 4.9436580507987337e-8, 1.4525519731754002e-9, 1.2647113004046306e-11, 1.5001198031229889e-14], [-4.7754590319369452e-7, -2.6708651093301177e-7, -8.1810755063833896e-8, -1.3100326350210399e-8, -1.0084076278315072e-9, -3.2140965332764001e-11, -3.1718391254272037e-13, -4.6983448609654543e-16], [8.5801061654099266e-9, 5.1897869073456026e-9, 1.8356531257434815e-9, 3.5585563711282313e-10, 3.4221206900249312e-11, 1.3935751641203742e-12, 1.7979781651997114e-14, 3.6379429087592846e-17], [-1.1654488590619774e-10, -1.1234885824922992e-10, -6.4145308055798576e-11, -1.7783721401695114e-11, -2.2027920535879497e-12, -1.0758580146885768e-13, -1.5936122821179301e-15, -3.6410498597804071e-18], [-1.7101959513901482e-12, 3.0783583534321676e-12, 3.4934618129612727e-12, 1.2071880482779235e-12, 1.6545602440458624e-13, 8.5720074968054620e-15, 1.3277332896028398e-16, 3.1950080681525279e-19], [2.7742177606763811e-13, -1.1212336515177555e-13, -2.0396839032442928e-13, -7.6058622259519453e-14, -1.0773299900470862e-14, -5.7161339445253387e-16, -9.0965637690183224e-18, -2.2982554219376488e-20], [-1.6140523307659880e-14, 4.3989521029529927e-15, 9.9230837990008745e-15, 3.8092044764629290e-15, 5.4981428975400004e-16, 2.9815198708574060e-17, 4.9076953664058887e-19, 1.3300815642100078e-21], [5.6275990025164714e-16, -1.3335558849218421e-16, -3.3139115239439995e-16, -1.3035050250275399e-16, -1.9357292276786672e-17, -1.0940038599213580e-18, -1.9258137470695974e-20, -5.9601505213481574e-23], [-3.4988684574815791e-18, 7.9545012852304258e-19, 2.4159818774147695e-18, 1.1479234103857106e-18, 2.1436642764913369e-19, 1.5874971747196439e-20, 3.8599569640095049e-22, 1.8254676235363726e-24], [-1.0805490135438299e-18, 2.3278610285226517e-19, 5.8193504472334740e-19, 2.1375793008635977e-19, 2.8130902022228266e-20, 1.2733435672712728e-21, 1.3236742075802041e-23, -1.6019749294677339e-26], [8.5792775979994235e-20, -1.8138914786199330e-20, -4.6858667266587026e-20, -1.7740357651167249e-20, -2.4579531585257208e-21, -1.2304093373474820e-22, -1.6901688813417776e-24, -2.0513942776153436e-27], [-3.5751485818431494e-21, 7.4153790147191694e-22, 1.9590871692435993e-21, 7.5246362173888885e-22, 1.0657317261454105e-22, 5.5351280725496532e-24, 8.1767889869531653e-26, 1.3146135841299328e-28]],
        [[7.1853638483133461e-2, 3.9701462749172011e-2, 1.1856091780012100e-2, 1.8220992743648384e-3, 1.3188462419539103e-4, 3.8363093593471257e-6, 3.2833605871559357e-8, 3.7556182011649822e-11], [-1.4377137562718311e-3, -7.9438821791990402e-4, -2.3723206289446877e-4, -3.6459696418171048e-5, -2.6390608860276531e-6, -7.6769917244832097e-8, -6.5710266255033654e-10, -7.5174725417606277e-13], [2.1572862502329206e-5, 1.1921184768704768e-5, 3.5609719354843473e-6, 5.4750505421767536e-7, 3.9655557945873150e-8, 1.1547384095262032e-9, 9.9006463834096328e-12, 1.1366368338009245e-14], [-3.5933154983495535e-7, -1.9884498420614207e-7, -5.9572871095308949e-8, -9.2043558617537029e-9, -6.7173970662684465e-10, -1.9792934126559826e-11, -1.7308585378907904e-13, -2.0682191682523833e-16], [6.2378009251286487e-9, 3.4924685680947083e-9, 1.0720401377708941e-9, 1.7220021596322728e-10, 1.3307639382420612e-11, 4.2599753786700292e-13, 4.2179022333761932e-15, 6.2224732057206145e-18], [-1.0628981728916249e-10, -6.4167653409981630e-11, -2.2615221701422771e-11, -4.3619590940662606e-12, -4.1662809751627776e-13, -1.6804250991374584e-14, -2.1350132855530014e-16, -4.1829117043308230e-19], [1.3983324527048707e-12, 1.2930556271710585e-12, 7.1712701688059941e-13, 1.9545845969572050e-13, 2.3903876581482084e-14, 1.1520891666705264e-15, 1.6746261137745651e-17, 3.6813902648354177e-20], [1.5004342036146910e-14, -3.2617141930591221e-14, -3.5814550115831317e-14, -1.2246827956417828e-14, -1.6630979732748528e-15, -8.5104782343161693e-17, -1.2913026840664901e-18, -2.9675572834404441e-21], [-2.7649212963243080e-15, 1.1288413332094725e-15, 2.0351739261651260e-15, 7.5414547053691706e-16, 1.0584244635612184e-16, 5.5338730661709431e-18, 8.5790016875079268e-20, 2.0409533182380888e-22], [1.7227442038464840e-16, -4.6049707971440826e-17, -1.0438536720893431e-16, -3.9767579752719690e-17, -5.6647951316919441e-18, -3.0059885225660647e-19, -4.7601917444184083e-21, -1.1814973580307637e-23], [-7.5644668049430479e-18, 1.7404154832101552e-18, 4.3427999311116556e-18, 1.6795880927523743e-18, 2.4258190588941101e-19, 1.3118364899601554e-20, 2.1425721353611062e-22, 5.6682748015740851e-25], [2.2426502251817123e-19, -4.8020668240160397e-20, -1.2697605899629455e-19, -5.0094600877511806e-20, -7.4247523412894989e-21, -4.1722797617275905e-22, -7.2504107699242814e-24, -2.1620793031825232e-26], [-1.6769822738921055e-21, 2.8829285308128525e-22, 1.0050309929807333e-21, 4.6177621152864273e-22, 8.2308578558985160e-23, 5.7885874473212681e-24, 1.3266176340359253e-25, 5.7390651932153516e-28], [-3.0019669142499902e-22, 6.6471784188663015e-23, 1.6286666499876715e-22, 5.9522079369884948e-23, 7.7843858112050096e-24, 3.4909097223996987e-25, 3.5844197469734758e-27, -3.6695263632779373e-30]],
        [[6.9138238004590070e-2, 3.8201112044737770e-2, 1.1408037873803622e-2, 1.7532396292563632e-3, 1.2690045073406081e-4, 3.6913246123654947e-6, 3.1592686738266436e-8, 3.6136669821653522e-11], [-1.2808316221105056e-3, -7.0770122679101636e-4, -2.1134176889851917e-4, -3.2480027510259181e-5, -2.3509283386873044e-6, -6.8384895323194202e-8, -5.8528492325626735e-10, -6.6947514299409959e-13], [1.7795550797231863e-5, 9.8327267762014830e-6, 2.9364264938189140e-6, 4.5130100734545563e-7, 3.2667368722639469e-8, 9.5032771520490593e-10, 8.1347468840905320e-12, 9.3075877247566611e-15], [-2.7469032980702414e-7, -1.5179889934838116e-7, -4.5346760186333384e-8, -6.9728805667223006e-9, -5.0512407627460500e-10, -1.4712344656625795e-11, -1.2618953213701233e-13, -1.4496387437031719e-16], [4.4480857620325534e-9, 2.4615140303260071e-9, 7.3748641397539322e-10, 1.1395130136245882e-10, 8.3164178724371293e-12, 2.4502301648123134e-13, 2.1416648369903532e-15, 2.5535088033268915e-18], [-7.3611670429244677e-11, -4.1156581912903811e-11, -1.2596541040925168e-11, -2.0138776742416263e-12, -1.5454551909229744e-13, -4.8961025502904476e-15, -4.7693995857264349e-17, -6.8240386592305982e-20], [1.1950199831827243e-12, 7.1059202570224245e-13, 2.4405840671042437e-13, 4.5647857077799086e-14, 4.2239649865152090e-15, 1.6509413933301665e-16, 2.0291003444898941e-18, 3.8035308350064014e-21], [-1.5969119124883398e-14, -1.3196375610782552e-14, -6.7140811413002116e-15, -1.7424823507978892e-15, -2.0678883117196918e-16, -9.7430598113941472e-18, -1.3838423035714189e-19, -2.9339886122960183e-22], [-4.5154870564904119e-17, 2.9729861367681887e-16, 2.9351443831787253e-16, 9.7740548279555063e-17, 1.3079791029414771e-17, 6.6022074055577946e-19, 9.8316057809840198e-21, 2.1772133390887712e-23], [1.9979274398757828e-17, -9.2333003713140475e-18, -1.5664915009176638e-17, -5.7386972413990142e-18, -7.9783210425129294e-19, -4.1197296394612792e-20, -6.2571715495109037e-22, -1.4241286250935010e-24], [-1.3124503884195829e-18, 3.6296004021473526e-19, 8.0311430588703002e-19, 3.0361332689269347e-19, 4.2826355220341431e-20, 2.2385385171141373e-21, 3.4533592269885305e-23, 8.0900646250634637e-26], [6.2752150961420487e-20, -1.4581880851835435e-20, -3.5919846264926093e-20, -1.3762786570020189e-20, -1.9602069863318994e-21, -1.0368688505307771e-22, -1.6296448389753710e-24, -3.9644344855604938e-27], [-2.3618832946584855e-21, 5.1140129644252157e-22, 1.3236858989530116e-21, 5.1244215376060299e-22, 7.3836037515975091e-23, 3.9718969293498781e-24, 6.4180922831168159e-26, 1.6516889435719384e-28], [6.4785326791208261e-23, -1.3393892604904790e-23, -3.6104811788501697e-23, -1.4206936999958305e-23, -2.0924568922570279e-24, -1.1630549248733229e-25, -1.9810357962695670e-27, -5.6375045111857347e-30]],
        [[6.6709287129539794e-2, 3.6859037870632217e-2, 1.1007252691215684e-2, 1.6916450785015149e-3, 1.2244219829833479e-4, 3.5616411896965043e-6, 3.0482771049226494e-8, 3.4867107842072164e-11], [-1.1505449833915072e-3, -6.3571332218137103e-4, -1.8984374188893912e-4, -2.9176060361674945e-5, -2.1117796205711733e-6, -6.1428195675481658e-8, -5.2574146130028587e-10, -6.0135935419641494e-13], [1.4882337702457467e-5, 8.2229798391552061e-6, 2.4556414635262742e-6, 3.7739537072222979e-7, 2.7316208799025033e-8, 7.9458893027934415e-10, 6.8006703330633096e-12, 7.7789804750511003e-15], [-2.1388967559555134e-7, -1.1818255523869822e-7, -3.5293982250924237e-8, -5.4243945726133961e-9, -3.9264879874634245e-10, -1.1422761553379517e-11, -9.7780744911531152e-14, -1.1188347180793103e-16], [3.2274370150163017e-9, 1.7835320572896156e-9, 5.3278729249300883e-10, 8.1924030083544640e-11, 5.9344734512193182e-12, 1.7283770194579192e-13, 1.4822546917058794e-15, 1.7021722416553458e-18], [-5.0054471163642339e-11, -2.7692710303738470e-11, -8.2925946769826517e-12, -1.2801962272453294e-12, -9.3303183820770326e-14, -2.7429227024731692e-15, -2.3883944319929222e-17, -2.8244892757821743e-20], [7.8689425524993017e-13, 4.3875372672217776e-13, 1.3353022523430856e-13, 2.1157658298446944e-14, 1.6025948097666344e-15, 4.9835233040136241e-17, 4.7233621489677016e-19, 6.4551366916825273e-22], [-1.2203134738526925e-14, -7.1117540905952274e-15, -2.3569956376599273e-15, -4.2158315648211391e-16, -3.7178303945899978e-17, -1.3842312134645241e-18, -1.6191991834704779e-20, -2.8649245601784185e-23], [1.6665590652012928e-16, 1.2152403890533953e-16, 5.4915256767960049e-17, 1.3190499569066844e-17, 1.4901453309369017e-18, 6.7810897822607432e-20, 9.3465292477766568e-22, 1.9088997932274868e-24], [-6.7883931295314366e-19, -2.4120921015152449e-18, -2.0108422361164303e-18, -6.3910995086412935e-19, -8.3614699480451554e-20, -4.1502775651624448e-21, -6.0661789320741042e-23, -1.3014557686869817e-25], [-1.0630632659562325e-19, 6.4376661462061219e-20, 9.7356972565833534e-20, 3.5008264298336198e-20, 4.8137732379428556e-21, 2.4568026743757311e-22, 3.6678243857762947e-24, 8.0647787237668758e-27], [7.6334072965153945e-21, -2.2988584399842095e-21, -4.8307123862747044e-21, -1.8096415203933483e-21, -2.5308025408733339e-22, -1.3071984726226975e-23, -1.9772265497300188e-25, -4.4427731651277495e-28], [-3.8022474248735087e-22, 9.1143414197480053e-23, 2.1928478746145139e-22, 8.3394758204266736e-23, 1.1763684367578177e-23, 6.1313331386885142e-25, 9.3963726209467351e-27, 2.1654513438870134e-29], [1.5543488648006188e-23, -3.4250493443233965e-24, -8.7094006979002631e-24, -3.3397662345702887e-24, -4.7467924124784037e-25, -2.4995693637156590e-26, -3.8943686433866274e-28, -9.2772428881559294e-31]],
        [[6.4519701442535324e-2, 3.5649220971489718e-2, 1.0645963805661190e-2, 1.6361205428074606e-3, 1.1842330166220709e-4, 3.4447381152875183e-6, 2.9482240643897594e-8, 3.3722670757105315e-11], [-1.0409450739077073e-3, -5.7515580834231100e-4, -1.7175937589890708e-4, -2.6396768812237267e-5, -1.9106126159598309e-6, -5.5576564061222501e-8, -4.7565928798959268e-10, -5.4407338118436762e-13], [1.2595491085589654e-5, 6.9594164513290842e-6, 2.0782980072516596e-6, 3.1940243462910630e-7, 2.3118530472202026e-8, 6.7248015803806655e-10, 5.7555135187754597e-12, 6.5833382072487052e-15], [-1.6933910019684691e-7, -9.3565423410669515e-8, -2.7941599516692523e-8, -4.2942082980208226e-9, -3.1081882006940310e-10, -9.0412795913692929e-12, -7.7381986102322721e-14, -8.8514024839822351e-17], [2.3904761430361346e-9, 1.3208320904791374e-9, 3.9445197139729848e-10, 6.0623837466850521e-11, 4.3882794234058957e-12, 1.2766078359165755e-13, 1.0927808458449140e-15, 1.2503455598544199e-18], [-3.4706849203216694e-11, -1.9178988521135696e-11, -5.7289076091868155e-12, -8.8081477711234704e-13, -6.3794838016398164e-14, -1.8575099869960708e-15, -1.5923055566322219e-17, -1.8268817609246170e-20], [5.1296833235182481e-13, 2.8370033530526366e-13, 8.4890839575922054e-14, 1.3089146446526552e-14, 9.5214411254046967e-16, 2.7908174579946330e-17, 2.4181345707548052e-19, 2.8314902886634676e-22], [-7.6557631870975817e-15, -4.2563117441428234e-15, -1.2876034300476252e-15, -2.0207023348162942e-16, -1.5091847577516679e-17, -4.5988398958285042e-19, -4.2293589319552258e-21, -5.4951455597385246e-24], [1.1342511500207148e-16, 6.4884967405706656e-17, 2.0772498767809322e-17, 3.5463357203370005e-18, 2.9619353201088248e-19, 1.0394676393530787e-20, 1.1412199866361498e-22, 1.8761186077673055e-25], [-1.5593432553269111e-18, -1.0248434510345589e-18, -4.0909423078265287e-19, -8.9051183130239903e-20, -9.3771548719792804e-21, -4.0540012045766644e-22, -5.3597748089161864e-24, -1.0478171479774458e-26], [1.3294840390196759e-20, 1.7973339529980635e-20, 1.2083659910134439e-20, 3.5672448032915547e-21, 4.5037822594458768e-22, 2.1842622801751677e-23, 3.1259321272847277e-25, 6.5110574265013559e-28], [3.8442660409803299e-22, -4.0227228254911966e-22, -5.0914122778999795e-22, -1.7755359499657582e-22, -2.4055713124194751e-23, -1.2125494416119717e-24, -1.7821252364511747e-26, -3.8088332273002831e-29], [-3.4974349054421145e-23, 1.2378780757345640e-23, 2.3793580060004281e-23, 8.8021868213190240e-24, 1.2203549054758842e-24, 6.2384359682966060e-26, 9.2866604005706840e-28, 2.0209184191888826e-30], [1.8062074830302375e-24, -4.5884245280960256e-25, -1.0623220630751123e-24, -4.0100031249844167e-25, -5.6121769767102824e-26, -2.8922515132669472e-27, -4.3502023298061820e-29, -9.6435923365235507e-32]],
        [[6.2532567065910467e-2, 3.4551264983314630e-2, 1.0318080070387984e-2, 1.5857298664601578e-3, 1.1477599687201899e-4, 3.3386440464803203e-6, 2.8574220702505057e-8, 3.2684050303759473e-11], [-9.4770795512425114e-4, -5.2363928469029239e-4, -1.5637494231859929e-4, -2.4032418319207453e-5, -1.7394796111809436e-6, -5.0598586913092239e-8, -4.3305460890322577e-10, -4.9534084610581341e-13], [1.0771985102615658e-5, 5.9518700497352515e-6, 1.7774131351609752e-6, 2.7316100571516627e-7, 1.9771543691118028e-8, 5.7512154397673060e-10, 4.9222530003601461e-12, 5.6302210209935304e-15], [-1.3604179544330637e-7, -7.5167495444578495e-8, -2.2447350342530066e-8, -3.4498125709997717e-9, -2.4969941482642899e-10, -7.2633472231380908e-12, -6.2164358537623099e-14, -7.1105569964469018e-17], [1.8040026948221672e-9, 9.9677075218434644e-10, 2.9766727198566584e-10, 4.5747019437769769e-11, 3.3112105925956213e-12, 9.6318357749715300e-14, 8.2436296190253872e-16, 9.4295171293069364e-19], [-2.4605574876147698e-11, -1.3595510778103094e-11, -4.0601262653408813e-12, -6.2400013364745934e-13, -4.5167817268867934e-14, -1.3139605374753277e-15, -1.1247116626150801e-17, -1.2867810925355371e-20], [3.4180453711847335e-13, 1.8887417927189763e-13, 5.6413812899871044e-14, 8.6724800963571117e-15, 6.2799972862326751e-16, 1.8279890140252402e-17, 1.5662139862730712e-19, 1.7951568611805256e-22], [-4.8082153496807782e-15, -2.6583303446235214e-15, -7.9488770515231579e-16, -1.2242093445480073e-16, -8.8895133285831723e-18, -2.5985038933986650e-19, -2.2414852554324886e-21, -2.6019489362443060e-24], [6.8157340327028536e-17, 3.7802980293629382e-17, 1.1379587547976537e-17, 1.7716878760568796e-18, 1.3076361434666382e-19, 3.9161839025677478e-21, 3.5078513451255616e-23, 4.3548464425882146e-26], [-9.6375332051077144e-19, -5.4361815285215844e-19, -1.6933497239979607e-19, -2.7791591400965916e-20, -2.2078325811686019e-21, -7.2988302733136490e-23, -7.4707167077241071e-25, -1.1257735926709016e-27], [1.3090816545425060e-20, 7.9954465302895685e-21, 2.8679053551950151e-21, 5.6232011439167849e-22, 5.4236939735272853e-23, 2.1847387796514759e-24, 2.7229268456219443e-26, 5.0270572114650084e-29], [-1.4274422043558950e-22, -1.2567394988123503e-22, -6.7043724495466603e-23, -1.7789209440277590e-23, -2.1235721578352512e-24, -9.9435402130076373e-26, -1.3841161198013499e-27, -2.7936940489730805e-30], [-4.1413340883615475e-25, 2.3577948896996846e-24, 2.3371416026022773e-24, 7.7425446851392946e-25, 1.0255033219817475e-25, 5.0891577081002330e-27, 7.3606709165213546e-29, 1.5342282157747325e-31], [1.2517363108009436e-25, -5.9785570465607369e-26, -9.9372441973842005e-26, -3.6041501689640876e-26, -4.9447272949730532e-27, -2.5022940742222081e-28, -3.6735661651393282e-30, -7.7895095462045052e-33]],
        [[6.0718480857251734e-2, 3.3548923703530587e-2, 1.0018749855163538e-2, 1.5397274261750525e-3, 1.1144631502942846e-4, 3.2417891049627437e-6, 2.7745275047270584e-8, 3.1735877410218607e-11], [-8.6760610702879807e-4, -4.7938042386209241e-4, -1.4315787280219480e-4, -2.2001158449682714e-5, -1.5924559074501943e-6, -4.6321910327793719e-8, -3.9645211370764855e-10, -4.5347381346614326e-13], [9.2977566926820159e-6, 5.1373111704800088e-6, 1.5341605597461880e-6, 2.3577683102587849e-7, 1.7065656277106771e-8, 4.9641173566685555e-10, 4.2486046228043461e-12, 4.8596813639609015e-15], [-1.1071064883698890e-7, -6.1171213023186685e-8, -1.8267622906433223e-8, -2.8074521091438340e-9, -2.0320492690840472e-10, -5.9108956605827814e-12, -5.0589174392004828e-14, -5.7865419763580154e-17], [1.3841691253628528e-9, 7.6479824038304455e-10, 2.2839252143859058e-10, 3.5100417736549397e-11, 2.5405883027186764e-12, 7.3901550763075489e-14, 6.3249655132752017e-16, 7.2346952871102689e-19], [-1.7800115424218579e-11, -9.8351463924258909e-12, -2.9370844322379061e-12, -4.5138572572528148e-13, -3.2671668858536049e-14, -9.5037020858093152e-16, -8.1339398425020191e-18, -9.3039956438338762e-21], [2.3314360719292978e-13, 1.2882025660500988e-13, 3.8470275608327193e-14, 5.9124259932322230e-15, 4.2795972450594232e-16, 1.2449302445187245e-17, 1.0655794515512589e-19, 1.2190303966926528e-22], [-3.0932516513694074e-15, -1.7092131743934469e-15, -5.1048154515115769e-16, -7.8467562407457003e-17, -5.6811090264403927e-18, -1.6532367117226253e-19, -1.4158915041131322e-21, -1.6215464993078731e-24], [4.1426740372574768e-17, 2.2897940383330630e-17, 6.8432593111818762e-18, 1.0530160929319468e-18, 7.6362351380626791e-20, 2.2276208652710004e-21, 1.9152409965879672e-23, 2.2092901609974135e-26], [-5.5832583008463682e-19, -3.0915996658087514e-19, -9.2743415634989594e-20, -1.4358569860576348e-20, -1.0508979528979239e-21, -3.1082346910700792e-23, -2.7307426484032375e-25, -3.2752949730590524e-28], [7.5287081076793437e-21, 4.2074476861287619e-21, 1.2863750514218846e-21, 2.0522965631230651e-22, 1.5687265441601334e-23, 4.9323941808986865e-25, 4.7311399302124530e-27, 6.5184646801809153e-30], [-9.9557658907514883e-23, -5.8061607958312853e-23, -1.9258543334781506e-23, -3.4441103614657213e-24, -3.0294577932309943e-25, -1.1200171202539868e-26, -1.2900527229300192e-28, -2.2024546620735068e-31], [1.1870122456798227e-24, 8.3305510475938788e-25, 3.6029431413450900e-25, 8.3557932583147727e-26, 9.1785087763958055e-27, 4.0684864254227790e-28, 5.4352986051593950e-30, 1.0546209365162986e-32], [-7.3216152765825158e-27, -1.3379285211175605e-26, -9.8766758796853875e-27, -3.0070770213693940e-27, -3.8350960442728268e-28, -1.8597406330025229e-29, -2.6379370155172653e-31, -5.3638393007292901e-34]],
        [[5.9053692777824195e-2, 3.2629074467007164e-2, 9.7440543243417548e-3, 1.4975109571772048e-3, 1.0839066386452480e-4, 3.1529052629754229e-6, 2.6984551087930953e-8, 3.0865738538760386e-11], [-7.9818688763414174e-4, -4.4102406081862049e-4, -1.3170347235274879e-4, -2.0240793655474553e-5, -1.4650397387413778e-6, -4.2615584572210848e-8, -3.6473104109377243e-10, -4.1719029954431056e-13], [8.0912714103129303e-6, 4.4706890452404200e-6, 1.3350865029630669e-6, 2.0518221681581398e-7, 1.4851201314108532e-8, 4.3199690009488995e-10, 3.6973018374033261e-12, 4.2290846887401164e-15], [-9.1134913742080031e-8, -5.0354986248706884e-8, -1.5037561738266503e-8, -2.3110414557860962e-9, -1.6727444745761904e-10, -4.8657372131961330e-12, -4.1644046946096153e-14, -4.7633709640860518e-17], [1.0778080955289687e-9, 5.9552382065614144e-10, 1.7784189720080761e-10, 2.7331558749118906e-11, 1.9782732419403300e-12, 5.7544700606496518e-14, 4.9250385131583559e-16, 5.6334071685272157e-19], [-1.3110891063100986e-11, -7.2441915369336101e-12, -2.1633406446897802e-12, -3.3247216637897054e-13, -2.4064523568894166e-14, -6.9999747444891650e-16, -5.9910231664430036e-18, -6.8527189816195151e-21], [1.6243948130553207e-13, 8.9753108924135852e-14, 2.6803091347906662e-14, 4.1192288542928247e-15, 2.9815278980613981e-16, 8.6728043914774894e-18, 7.4227763946166355e-20, 8.4904841380268400e-23], [-2.0387019053081301e-15, -1.1264534136113595e-15, -3.3639689102740072e-16, -5.1699752626527871e-17, -3.7421368277940221e-18, -1.0885608076715921e-19, -9.3170611245703833e-22, -1.0658112272505450e-24], [2.5832391867868573e-17, 1.4273670309805602e-17, 4.2628355818818962e-18, 6.5520088965010777e-19, 4.7431326907810822e-20, 1.3800278898486184e-21, 1.1815588886769281e-23, 1.3524296972129089e-26], [-3.2971341256531097e-19, -1.8221347706011585e-19, -5.4437250353714607e-20, -8.3718442657026840e-21, -6.0658123891269913e-22, -1.7671722975184156e-23, -1.5161531247310459e-25, -1.7419898389002880e-28], [4.2307277638807869e-21, 2.3402760054715349e-21, 7.0054784365669403e-22, 1.0808220873489759e-22, 7.8690512903022326e-24, 2.3091865246093337e-25, 2.0038415191400598e-27, 2.3502585882492387e-30], [-5.4398342933781020e-23, -3.0233502428113729e-23, -9.1394788345236811e-24, -1.4324420729533068e-24, -1.0674532143357794e-25, -3.2400577469026932e-27, -2.9575416748093102e-29, -3.7765007957725346e-32], [6.9375473571702006e-25, 3.9396617979417958e-25, 1.2433144458636060e-25, 2.0788765153627816e-26, 1.6900692829507578e-27, 5.7354112923577432e-29, 6.0336272448611122e-31, 9.3211372937558917e-34], [-8.4422344528545999e-27, -5.2472562224972890e-27, -1.9339101176516591e-27, -3.8966779293774579e-28, -3.8424833612737978e-29, -1.5707755657899234e-30, -1.9699250035276972e-32, -3.6108424832697636e-35]],
        [[5.7518780660986020e-2, 3.1780985898709573e-2, 9.4907887562453302e-3, 1.4585879431343939e-3, 1.0557339477444498e-4, 3.0709555615468836e-6, 2.6283173875361164e-8, 3.0063482255536113e-11], [-7.3755667076344150e-4, -4.0752390582110487e-4, -1.2169928634672358e-4, -1.8703304468408023e-5, -1.3537554286831847e-6, -3.9378507924002839e-8, -3.3702609822126036e-10, -3.8550055528220066e-13], [7.0931057086751676e-6, 3.9191702243175155e-6, 1.1703858658556406e-6, 1.7987026754038578e-7, 1.3019108551296649e-8, 3.7870434968554756e-10, 3.2411905905893532e-12, 3.7073709693567616e-15], [-7.5793763435342600e-8, -4.1878504712703411e-8, -1.2506221264917331e-8, -1.9220134406612768e-9, -1.3911638629756460e-10, -4.0466657452577194e-12, -3.4633916799631066e-14, -3.9615312380300917e-17], [8.5039209704772067e-10, 4.6986912691908865e-10, 1.4031750440168357e-10, 2.1564637622929226e-11, 1.5608602924506901e-12, 4.5402846182021328e-14, 3.8858618426044232e-16, 4.4447652948213518e-19], [-9.8138432541726454e-12, -5.4224656956774321e-12, -1.6193165604237190e-12, -2.4886399806873886e-13, -1.8012912851631783e-14, -5.2396587460892665e-16, -4.4844304593603193e-18, -5.1294263147481963e-21], [1.1535270159953019e-13, 6.3736099033102633e-14, 1.9033578585547499e-14, 2.9251679677240231e-15, 2.1172529534627671e-16, 6.1587403946163362e-18, 5.2710403095902675e-20, 6.0291779581185667e-23], [-1.3734729860545463e-15, -7.5888845296164517e-16, -2.2662778498714567e-16, -3.4829232231886561e-17, -2.5209627121175661e-18, -7.3330802920052675e-20, -6.2761343179070025e-22, -7.1788751907705301e-25], [1.6510788258725717e-17, 9.1227656595493513e-18, 2.7243543090561791e-18, 4.1869459637321084e-19, 3.0305707338870825e-20, 8.8155868861610802e-22, 7.5451453567316579e-24, 8.6307945486803074e-27], [-1.9994791138308053e-19, -1.1047948764836500e-19, -3.2993730923798158e-20, -5.0709094987209928e-21, -3.6706593322292946e-22, -1.0678677468641160e-23, -9.1412750613023611e-26, -1.0459753022019021e-28], [2.4355162407312512e-21, 1.3458375724577061e-21, 4.0199402972686773e-22, 6.1801586066199993e-23, 4.4755600165825613e-24, 1.3028808428052402e-25, 1.1164509032892499e-27, 1.2798563078648033e-30], [-2.9800291066277691e-23, -1.6474907002166008e-23, -4.9257295619077445e-24, -7.5846361350486529e-25, -5.5057239008388571e-26, -1.6084808375838322e-27, -1.3860230515000787e-29, -1.6049493493729780e-32], [3.6560065744748753e-25, 2.0258232599473538e-25, 6.0858062083260032e-26, 9.4433570496378146e-27, 6.9342579392591966e-28, 2.0605091140761549e-29, 1.8223018553162426e-31, 2.2078437954281525e-34], [-4.4782506645246524e-27, -2.5067252641557361e-27, -7.6922390340176019e-28, -1.2333611342599987e-28, -9.4885615968673543e-30, -3.0078210906467656e-31, -2.9126063169145834e-33, -4.0431495538517211e-36]],
        [[5.6097686022309801e-2, 3.0995785166818280e-2, 9.2563034479109478e-3, 1.4225511655426868e-3, 1.0296503306064071e-4, 2.9950826304107099e-6, 2.5633805494243663e-8, 2.9320715232968289e-11], [-6.8423261969257370e-4, -3.7806064363663495e-4, -1.1290064182531044e-4, -1.7351088425624212e-5, -1.2558812903583351e-6, -3.6531511007185903e-8, -3.1265970362915133e-10, -3.5762954263631896e-13], [6.2591949875121982e-6, 3.4584075905199113e-6, 1.0327878429962230e-6, 1.5872357232889813e-7, 1.1488499161374949e-8, 3.3418145233308161e-10, 2.8601355641790350e-12, 3.2715088059731334e-15], [-6.3619365263361173e-8, -3.5151756123586520e-8, -1.0497405361927740e-8, -1.6132893996887273e-9, -1.1677077099191837e-10, -3.3966687286280945e-12, -2.9070832515472077e-14, -3.3252089783300801e-17], [6.7896743237015648e-10, 3.7515145742178772e-10, 1.1203186853368778e-10, 1.7217571362444463e-11, 1.2462172522186504e-12, 3.6250400113655403e-14, 3.1025377940863297e-16, 3.5487757446490948e-19], [-7.4531994255557911e-12, -4.1181336454191725e-12, -1.2298025189299268e-12, -1.8900169139048892e-13, -1.3680046025992564e-14, -3.9792992891607211e-16, -3.4057352254910377e-18, -3.8955820687701205e-21], [8.3330754819259657e-14, 4.6042936212568625e-14, 1.3749849815259340e-14, 2.1131399936813416e-15, 1.5295023245737186e-16, 4.4490695296747081e-18, 3.8077942940881345e-20, 4.3554694426721577e-23], [-9.4378194800935159e-16, -5.2147004876168744e-16, -1.5572714733947195e-16, -2.3932863756912718e-17, -1.7322739643919067e-18, -5.0388993747074053e-20, -4.3126087327202922e-22, -4.9328930798808515e-25], [1.0791799623996319e-17, 5.9628191631876509e-18, 1.7806834729409124e-18, 2.7366375376724358e-19, 1.9807948875249853e-20, 5.7618120066097460e-22, 4.9313313320866736e-24, 5.6406234778079988e-27], [-1.2431424348530996e-19, -6.8687722282269273e-20, -2.0512337934229823e-20, -3.1524431857351774e-21, -2.2817697972432378e-22, -6.6373523086060898e-24, -5.6807456124278523e-26, -6.4979714038367508e-29], [1.4404336248601214e-21, 7.9589260163401913e-22, 2.3768226386054840e-22, 3.6529105840252363e-23, 2.6441060586024268e-24, 7.6917409359148260e-26, 6.5837065563358301e-28, 7.5319235874454138e-31], [-1.6769807409663251e-23, -9.2663111794816205e-24, -2.7674894838731748e-24, -4.2539067846206353e-25, -3.0797661186439812e-26, -8.9618491275090972e-28, -7.6745408104169000e-30, -8.7874321067107168e-33], [1.9598933645853950e-25, 1.0831997001009442e-25, 3.2365420436412370e-26, 4.9785416724052075e-27, 3.6083524600602288e-28, 1.0517371018615018e-29, 9.0297660711360886e-32, 1.0387268950397738e-34], [-2.3021637706706124e-27, -1.2733201086398657e-27, -3.8167485350911972e-28, -5.8868745052118006e-29, -4.2914671552233182e-30, -1.2607962814506440e-31, -1.0947681159183889e-33, -1.2879797142592327e-36]],
        [[5.4777000119640048e-2, 3.0266063507787332e-2, 9.0383859126024909e-3, 1.3890605992934571e-3, 1.0054096751938054e-4, 2.9245705703278506e-6, 2.5030318827528700e-8, 2.8630429090880791e-11], [-6.3703877499676055e-4, -3.5198451866410273e-4, -1.0511350159987740e-4, -1.6154325002053159e-5, -1.1692588978155996e-6, -3.4011808778210888e-8, -2.9109450332878191e-10, -3.3296262000202048e-13], [5.5563533875735015e-6, 3.0700648836684440e-6, 9.1681665797684527e-7, 1.4090058874293558e-7, 1.0198461840664701e-8, 2.9665639885622221e-10, 2.5389724976838063e-12, 2.9041528619558267e-15], [-5.3848067000878882e-8, -2.9752797927243391e-8, -8.8851088803448490e-9, -1.3655042820103472e-9, -9.8835948363253664e-11, -2.8749743811442917e-12, -2.4605843371040968e-14, -2.8144901337873655e-17], [5.4794779808260209e-10, 3.0275887360585588e-10, 9.0413196199560429e-11, 1.3895114648970050e-11, 1.0057360141918104e-12, 2.9255198365481709e-14, 2.5038443246501371e-16, 2.8639722045197453e-19], [-5.7351194253912219e-12, -3.1688388991011491e-12, -9.4631364459094273e-13, -1.4543382093053474e-13, -1.0526579671532631e-14, -3.0620080426081719e-16, -2.6206595369659207e-18, -2.9975889470025156e-21], [6.1138465667338775e-14, 3.3780978892952256e-14, 1.0088048739201779e-14, 1.5503775970718875e-15, 1.1221718029845636e-16, 3.2642123042063243e-18, 2.7937186958530140e-20, 3.1955392076519032e-23], [-6.6022261266147036e-16, -3.6479433893018121e-16, -1.0893891176493587e-16, -1.6742231645793197e-17, -1.2118119099733317e-18, -3.5249605872061316e-20, -3.0168835521974749e-22, -3.4508019324314604e-25], [7.1981708943444736e-18, 3.9772221778881980e-18, 1.1877220069212502e-18, 1.8253457166685959e-19, 1.3211953042591981e-20, 3.8431390715858530e-22, 3.2892011131346074e-24, 3.7622876266368788e-27], [-7.9060396991511321e-20, -4.3683429015874056e-20, -1.3045229958634711e-20, -2.0048513350332089e-21, -1.4511229978007684e-22, -4.2210795913969225e-24, -3.6126695081408093e-26, -4.1322866117210469e-29], [8.7345965758619650e-22, 4.8261498799759081e-22, 1.4412399299874076e-22, 2.2149680727592619e-23, 1.6032108563784694e-24, 4.6634961419925379e-26, 3.9913414096933256e-28, 4.5654708938707751e-31], [-9.6961365249236203e-24, -5.3574494695080476e-24, -1.5999135453462344e-24, -2.4588517522039505e-25, -1.7797650569796922e-26, -5.1771902995848555e-28, -4.4311623396377505e-30, -5.0688914607477318e-33], [1.0806580184379259e-25, 5.9709473561857299e-26, 1.7832433194751974e-26, 2.7407325756934453e-27, 1.9839923300849238e-28, 5.7719724929814736e-30, 4.9414262742627076e-32, 5.6550028885400226e-35], [-1.2138315443050740e-27, -6.6958795371197061e-28, -2.0020515000405938e-28, -3.0748847226388211e-29, -2.2311073007178533e-30, -6.4852251716625190e-32, -5.5477959670351068e-34, -6.3536388016906220e-37]],
        [[5.3545426937866898e-2, 2.9585579508068093e-2, 8.8351722705234253e-3, 1.3578297947913648e-3, 9.8280464771951000e-5, 2.8588162815798005e-6, 2.4467552167582253e-8, 2.7986719713332309e-11], [-5.9503184214063443e-4, -3.2877433017597809e-4, -9.8182218956994616e-5, -1.5089093696940313e-5, -1.0921568720994759e-6, -3.1769038284893616e-8, -2.7189945942241713e-10, -3.1100675330913969e-13], [4.9592365268008636e-6, 2.7401385132895799e-6, 8.1829040406010433e-7, 1.2575862217555260e-7, 9.1024780012229686e-9, 2.6477604041657823e-10, 2.2661202901917435e-12, 2.5920563268409123e-15], [-4.5924645281534308e-8, -2.5374851262896411e-8, -7.5777181307353331e-9, -1.1645784755970174e-9, -8.4292828367838468e-11, -2.4519390574470007e-12, -2.0985240355027416e-14, -2.4003547061451383e-17], [4.4654543203308921e-10, 2.4673078802247851e-10, 7.3681470935063273e-11, 1.1323706374518170e-11, 8.1961607389820603e-13, 2.3841276922551812e-14, 2.0404867937933201e-16, 2.3339699691063359e-19], [-4.4660103433540279e-12, -2.4676151009223440e-12, -7.3690645498658964e-13, -1.1325116363544335e-13, -8.1971812967845191e-15, -2.3844245556593761e-16, -2.0407408682207766e-18, -2.3342605870721398e-21], [4.5492792911737500e-14, 2.5136238866934724e-14, 7.5064610637273533e-15, 1.1536273627597474e-15, 8.3500180820839570e-17, 2.4288822505027268e-18, 2.0787905665672085e-20, 2.3777829730268823e-23], [-4.6942830562632655e-16, -2.5937431550356723e-16, -7.7457220660866084e-17, -1.1903980911508744e-17, -8.6161666321534514e-19, -2.5063004658942074e-20, -2.1450499577994130e-22, -2.4535724539931416e-25], [4.8904841165241245e-18, 2.7021505855499286e-18, 8.0694603088893268e-19, 1.2401516714135324e-19, 8.9762857985731755e-21, 2.6110531902182042e-22, 2.2347039579179210e-24, 2.5561214150864874e-27], [-5.1326249840791065e-20, -2.8359412566409166e-20, -8.4690008604691765e-21, -1.3015549165250214e-21, -9.4207260757930028e-23, -2.7403336168327090e-24, -2.3453504227347373e-26, -2.6826824054906054e-29], [5.4184412263288443e-22, 2.9938640719878609e-22, 8.9406080744361073e-23, 1.3740338386609884e-23, 9.9453342763170958e-25, 2.8929342265432833e-26, 2.4759566307934873e-28, 2.8320756512098830e-31], [-5.7475400320220839e-24, -3.1757033438671596e-24, -9.4836404430649537e-25, -1.4574902872821248e-25, -1.0549408601863693e-26, -3.0686551302756699e-28, -2.6263576169768390e-30, -3.0041222517846579e-33], [6.1212901579189758e-26, 3.3822143662115181e-26, 1.0100018601775617e-26, 1.5522361445676568e-27, 1.1235374553769593e-28, 3.2682790415008344e-30, 2.7973877192022708e-32, 3.1997231735871140e-35], [-6.5937502234973430e-28, -3.6446078161304693e-28, -1.0862332928855754e-28, -1.6686697250729729e-29, -1.2087411463823490e-30, -3.5180893510909338e-32, -3.0221623904112205e-34, -3.4567536721697592e-37]],
        [[5.2393373501010158e-2, 2.8949032738290372e-2, 8.6450796489576486e-3, 1.3286154888979587e-3, 9.6165917299058734e-5, 2.7973075905321459e-6, 2.3941122009525181e-8, 2.7384573116023374e-11], [-5.5744729642962647e-4, -3.0800765356141035e-4, -9.1980644797329390e-5, -1.4136007338149621e-5, -1.0231719590646663e-6, -2.9762381183455435e-8, -2.5472522278880029e-10, -2.9136234655919492e-13], [4.4482422498203164e-6, 2.4577976548009835e-6, 7.3397466087603182e-7, 1.1280059207043862e-7, 8.1645686799333892e-9, 2.3749380844331880e-10, 2.0326217480311651e-12, 2.3249736939660926e-15], [-3.9439328711913487e-8, -2.1791504187745539e-8, -6.5076194799584855e-9, -1.0001208072119268e-9, -7.2389292191065783e-11, -2.1056848643121070e-12, -1.8021778663431305e-14, -2.0613850733193475e-17], [3.6716348823218001e-10, 2.0286969765238258e-10, 6.0583188060893508e-11, 9.3107021904912545e-12, 6.7391372773294506e-13, 1.9603036490451592e-14, 1.6777514563058883e-16, 1.9190624151802468e-19], [-3.5157963561330290e-12, -1.9425911525413975e-12, -5.8011800915436582e-13, -8.9155196209687282e-14, -6.4531019675185628e-15, -1.8771007050329550e-16, -1.6065411310316808e-18, -1.8376099102268350e-21], [3.4289152315887966e-14, 1.8945865223624576e-14, 5.6578233669311063e-15, 8.6952024319027652e-16, 6.2936351785252512e-17, 1.8307144517966438e-18, 1.5668408509508575e-20, 1.7921995396540256e-23], [-3.3876114353322654e-16, -1.8717648395840161e-16, -5.5896707391667405e-17, -8.5904623480006202e-18, -6.2178237318164917e-19, -1.8086621550078854e-20, -1.5479671050574776e-22, -1.7706111833662319e-25], [3.3789856129756567e-18, 1.8669987939177485e-18, 5.5754378479709290e-19, 8.5685885889762918e-20, 6.2019913861364926e-21, 1.8040567877476806e-22, 1.5440255419421093e-24, 1.7661027063653667e-27], [-3.3953472777148951e-20, -1.8760391432220957e-20, -5.6024351402704586e-21, -8.6100792734980970e-22, -6.2320225799789584e-23, -1.8127923693915895e-24, -1.5515020084298104e-26, -1.7746545221451540e-29], [3.4318573091622345e-22, 1.8962121214598092e-22, 5.6626779341645620e-23, 8.7026632464499484e-24, 6.2990354078540056e-25, 1.8322853247645204e-26, 1.5681853493445854e-28, 1.7937374934638618e-31], [-3.4853560137641099e-24, -1.9257702564011361e-24, -5.7509515173539196e-25, -8.8383248589815162e-26, -6.3972306430880027e-27, -1.8608482490701825e-28, -1.5926321569460458e-30, -1.8216996999386456e-33], [3.5541508265450013e-26, 1.9637044079657252e-26, 5.8645856629388373e-27, 9.0127358421500599e-28, 6.5235759395122528e-29, 1.8977253881838078e-30, 1.6242376399710517e-32, 1.8577402517800042e-35], [-3.6775004985178097e-28, -2.0435723485787890e-28, -6.1076851246642892e-29, -9.3848915392894814e-30, -6.8254957229083639e-31, -1.9694353261666975e-32, -1.6765907998013884e-34, -1.9280862418370255e-37]],
        [[5.1312633297929394e-2, 2.8351888835732381e-2, 8.4667539464662118e-3, 1.3012095770938611e-3, 9.4182262381529347e-5, 2.7396063475798709e-6, 2.3447278392792680e-8, 2.6819699981635100e-11], [-5.2365964641916920e-4, -2.8933888457512307e-4, -8.6405570966936007e-5, -1.3279204423244909e-5, -9.6115609447116903e-7, -2.7958442182683259e-8, -2.3928597547062758e-10, -2.7370247260371970e-13], [4.0080340994583735e-6, 2.2145684197862838e-6, 6.6133886234464028e-7, 1.0163758942662676e-7, 7.3565844301453500e-9, 2.1399088205897674e-10, 1.8314688858815367e-12, 2.0948890196203258e-15], [-3.4085546034962141e-8, -1.8833366170811618e-8, -5.6242276581938156e-9, -8.6435710059253896e-10, -6.2562640694022700e-11, -1.8198438138211154e-12, -1.5575370735930610e-14, -1.7815576001724815e-17], [3.0436732369588749e-10, 1.6817278654462265e-10, 5.0221613537450317e-11, 7.7182878970177070e-12, 5.5865390837087911e-13, 1.6250318847440626e-14, 1.3908047421637024e-16, 1.5908441608016910e-19], [-2.7955036489797478e-12, -1.5446061447592165e-12, -4.6126733381494863e-13, -7.0889679345302487e-14, -5.1310338455649011e-15, -1.4925329395902962e-16, -1.2774037910921795e-18, -1.4611327531739030e-21], [2.6151157924289848e-14, 1.4449360220713469e-14, 4.3150274178013530e-15, 6.6315320333708597e-16, 4.7999392331051262e-17, 1.3962229891806813e-18, 1.1949756633708195e-20, 1.3668489894682349e-23], [-2.4781386060979231e-16, -1.3692516981480448e-16, -4.0890105368901559e-17, -6.2841789251039094e-18, -4.5485231495067184e-19, -1.3230902058859826e-20, -1.1323840165449690e-22, -1.2952547873175836e-25], [2.3709160600096645e-18, 1.3100077749276185e-18, 3.9120897949979584e-19, 6.0122790149814347e-20, 4.3517205043160292e-21, 1.2658435691826469e-22, 1.0833887355822889e-24, 1.2392125161009270e-27], [-2.2851350513922882e-20, -1.2626109943164426e-20, -3.7705482982062757e-21, -5.7947515516061221e-22, -4.1942729344038680e-23, -1.2200446734098006e-24, -1.0441911532117542e-26, -1.1943771466963389e-29], [2.2154131792490368e-22, 1.2240873998430517e-22, 3.6555048624608552e-23, 5.6179475666469400e-24, 4.0663012289903412e-25, 1.1828198138317661e-26, 1.0123317796247624e-28, 1.1579354522361119e-31], [-2.1580923004394585e-24, -1.1924154921029265e-24, -3.5609250991345774e-25, -5.4725924031384126e-26, -3.9610935727756905e-27, -1.1522169768571188e-28, -9.8614128749885319e-31, -1.1279760937162504e-33], [2.1110565816600707e-26, 1.1664421341041096e-26, 3.4830533287817697e-27, 5.3527469992180157e-28, 3.8745748568042732e-29, 1.1271969286209320e-30, 9.6471813805398717e-33, 1.1031030530722618e-35], [-2.1109072615601539e-28, -1.1706836701498605e-28, -3.4804965742407409e-29, -5.3331751488574543e-30, -3.8799234393926857e-31, -1.1185869900213365e-32, -9.7841432651871085e-35, -1.1040594541679643e-37]],
        [[5.0296138797324885e-2, 2.7790242760857575e-2, 8.2990289970451943e-3, 1.2754328376392675e-3, 9.2316527851604556e-5, 2.6853352138033762e-6, 2.2982791813005740e-8, 2.6288406306237330e-11], [-4.9315273065238027e-4, -2.7248282732467684e-4, -8.1371829120882759e-5, -1.2505595890374246e-5, -9.0516188484804155e-7, -2.6329663172365892e-8, -2.2534585778584213e-10, -2.5775734806723818e-13], [3.6264861452680423e-6, 2.0037508396419044e-6, 5.9838218989810158e-7, 9.1962119270370658e-8, 6.6562685971214465e-9, 1.9361985196319475e-10, 1.6571207667710289e-12, 1.8954644139763924e-15], [-2.9631062444090951e-8, -1.6372119973297326e-8, -4.8892231554332931e-9, -7.5139823769818546e-10, -5.4386616285106294e-11, -1.5820167771557892e-12, -1.3539897010681388e-14, -1.5487340130713634e-17], [2.5421277763581631e-10, 1.4046077834879422e-10, 4.1945947809640843e-11, 6.4464456337442409e-12, 4.6659726825986081e-13, 1.3572543338466631e-14, 1.1616238312354577e-16, 1.3287001639742064e-19], [-2.2432713543829019e-12, -1.2394799483115463e-12, -3.7014718154179138e-13, -5.6885916444696239e-14, -4.1174338113726245e-15, -1.1976934424956694e-16, -1.0250615604035966e-18, -1.1724961444216810e-21], [2.0162068019383065e-14, 1.1140194420836534e-14, 3.3268078054166172e-15, 5.1127908108933222e-16, 3.7006660120723490e-17, 1.0764625780464197e-18, 9.2130454323025869e-21, 1.0538157575144575e-23], [-1.8356596253553553e-16, -1.0142612899271670e-16, -3.0288990017539816e-17, -4.6549508985995877e-18, -3.3692789741389616e-19, -9.8006756589969416e-21, -8.3880361431116994e-23, -9.5944872161605200e-26], [1.6873499172826690e-18, 9.3231538136055196e-19, 2.7841830857284303e-19, 4.2788602555851795e-20, 3.0970625053743312e-21, 9.0088429435074039e-23, 7.7103357816401161e-25, 8.8193132251014091e-28], [-1.5625116500616768e-20, -8.6333820269511915e-21, -2.5781958224254785e-21, -3.9622895820680369e-22, -2.8679269167048921e-23, -8.3423253893092428e-25, -7.1398880366398069e-27, -8.1668179898644369e-30], [1.4554206884401305e-22, 8.0416697643152483e-23, 2.4014921815278214e-23, 3.6907233480332693e-24, 2.6713657603984332e-25, 7.7705614805065145e-27, 6.6505365516383513e-29, 7.6070830639266434e-32], [-1.3621537351768038e-24, -7.5263362326649091e-25, -2.2475998818386911e-25, -3.4542116584447674e-26, -2.5001806240452892e-27, -7.2725977801273994e-29, -6.2243524795330378e-31, -7.1196153226896893e-34], [1.2802367283624285e-26, 7.0745045980220339e-27, 2.1122067690334867e-27, 3.2461714292356379e-28, 2.3497720985770268e-29, 6.8358991837686699e-31, 5.8511675490953228e-33, 6.6915671888388416e-36], [-1.2624591843911978e-28, -6.8518204339196454e-29, -2.0508622685511439e-29, -3.1787748864960526e-30, -2.2830523826464690e-31, -6.6668128521333155e-33, -5.7256650550909593e-35, -6.4173332779544859e-38]],
        [[4.9337765908452711e-2, 2.7260710755537941e-2, 8.1408943054979542e-3, 1.2511299729979803e-3, 9.0557473188495975e-5, 2.6341672210313386e-6, 2.2544863870406903e-8, 2.5787491196290676e-11], [-4.6549723382366194e-4, -2.5720227122395512e-4, -7.6808580815996340e-5, -1.1804294962708362e-5, -8.5440133932135139e-7, -2.4853122800377440e-8, -2.1270869435146971e-10, -2.4330258166531164e-13], [3.2939179036360669e-6, 1.8199961342012613e-6, 5.4350733177187711e-7, 8.3528699404034271e-8, 6.0458530448482699e-9, 1.7586387244664162e-10, 1.5051538992576998e-12, 1.7216401549054897e-15], [-2.5897934141306614e-8, -1.4309445893884239e-8, -4.2732446573752047e-9, -6.5673183708882230e-10, -4.7534610322455072e-11, -1.3827032487454135e-12, -1.1834046171119619e-14, -1.3536136798537993e-17], [2.1379938438170413e-10, 1.1813107200995463e-10, 3.5277604463516901e-11, 5.4216240456611125e-12, 3.9242012001086783e-13, 1.1414852696410360e-14, 9.7695506225516532e-17, 1.1174704895932460e-19], [-1.8154407265337261e-12, -1.0030896946507408e-12, -2.9955371509992588e-13, -4.6036788763036367e-14, -3.3321680033796524e-15, -9.6927259787844622e-17, -8.2956460007613338e-19, -9.4888086014562320e-22], [1.5700971855681887e-14, 8.6752945630490330e-15, 2.5907122063021055e-15, 3.9815253350326232e-16, 2.8818498601912748e-17, 8.3828249291456221e-19, 7.1745500956863159e-21, 8.2064654944628945e-24], [-1.3755450433640267e-16, -7.6003310786183531e-17, -2.2696947468713069e-17, -3.4881709807348492e-18, -2.5247572744810355e-19, -7.3441016178254973e-21, -6.2855451963102925e-23, -7.1895950379412215e-26], [1.2166874234068140e-18, 6.7225913696515145e-19, 2.0075744279072457e-19, 3.0853324530688664e-20, 2.2331805402048703e-21, 6.4959530898311030e-23, 5.5596462118737488e-25, 6.3592900168886702e-28], [-1.0841474046857075e-20, -5.9902649168390630e-21, -1.7888790202878432e-21, -2.7492313204085475e-22, -1.9899086985234209e-23, -5.7883155102346902e-25, -4.9540053550332379e-27, -5.6665398505798809e-30], [9.7172823359185222e-23, 5.3691125779591536e-23, 1.6033836761473125e-23, 2.4641535331539705e-24, 1.7835678243639185e-25, 5.1881040459014088e-27, 4.4403064121229826e-29, 5.0789557232671714e-32], [-8.7513135363526433e-25, -4.8353834918002713e-25, -1.4439962228092395e-25, -2.2191952369214808e-26, -1.6062629366598758e-27, -4.6723686378066268e-29, -3.9989103361382057e-31, -4.5740933262435647e-34], [7.9166136143454640e-27, 4.3736843341772315e-27, 1.3063536590459955e-27, 2.0069818806982251e-28, 1.4528995394177949e-29, 4.2267455916100621e-31, 3.6168684923792322e-33, 4.1371235051345341e-36], [-7.6463160598922359e-29, -4.2887268320453044e-29, -1.2827793961015783e-29, -1.9840380021378907e-30, -1.4612305620915157e-31, -4.0195189687546105e-33, -3.5379021404462790e-35, -3.8688982595702298e-38]],
    ],
    [
        [[1.6249983290090374e-1, 1.4906624947076163e-1, 1.2642466630544187e-1, 1.0044567843859003e-1, 7.5763892552082024e-2, 5.4555656204084457e-2, 3.6989305030310191e-2, 2.2241104509755475e-2, 9.2535806768129568e-3], [-6.4926152631421231e-3, -1.4492271243262033e-2, -2.6132647176507870e-2, -3.5820788058523341e-2, -3.9966266933308643e-2, -3.7932223151251802e-2, -3.0997303033484706e-2, -2.0939217208831224e-2, -9.2508026696900778e-3], [1.4641320287519815e-4, 6.8805169994831060e-4, 1.9963976331602444e-3, 4.0070392185751340e-3, 6.0819538001969840e-3, 7.3301413171583482e-3, 7.1370671490943903e-3, 5.4191573827653733e-3, 2.5505134773250302e-3], [-3.4389170077267122e-6, -2.8774991548118476e-5, -1.2394716240293238e-4, -3.4330776541796327e-4, -6.7736224563261848e-4, -1.0051662785367729e-3, -1.1444948205918022e-3, -9.6704982579352768e-4, -4.8272153776945414e-4], [8.0766238896434175e-8, 1.0961239594934757e-6, 6.6789209340077536e-6, 2.4492251930451444e-5, 6.0779053384805710e-5, 1.0834801605209903e-4, 1.4182673483292995e-4, 1.3194355165058962e-4, 6.9473991215777588e-5], [-1.8695297385008095e-9, -3.8873124278937029e-8, -3.2300436844697895e-7, -1.5201580296345543e-6, -4.6247562088132348e-6, -9.7066627014770689e-6, -1.4392702007379890e-5, -1.4598260559907856e-5, -8.0654899879593328e-6], [4.2477355989367919e-11, 1.3005198268470985e-9, 1.4310900267328930e-8, 8.4317491254772756e-8, 3.0799057062282629e-7, 7.4835674439922689e-7, 1.2409360450650812e-6, 1.3602569013006780e-6, 7.8477613606333521e-7], [-9.4757748156216027e-13, -4.1408199654280514e-11, -5.8895345728127471e-10, -4.2552514168884447e-9, -1.8337459571043759e-8, -5.0842920968559045e-8, -9.3235663891669457e-8, -1.0959103594432564e-7, -6.5735798536461928e-8], [2.0775408522366411e-14, 1.2627035992578740e-12, 2.2736919526995212e-11, 1.9791512208892229e-10, 9.9108926207631005e-10, 3.0964758836484118e-9, 6.2180838146558911e-9, 7.7831525868189154e-9, 4.8348998858226088e-9], [-4.4836344224732249e-16, -3.7052847220206066e-14, -8.2948793370901222e-13, -8.5650731372318663e-12, -4.9183139442555164e-11, -1.7124786172474386e-10, -3.7330422688024277e-10, -4.9451519371508506e-10, -3.1702758696261067e-10], [9.5353447396201488e-18, 1.0501276445846660e-15, 2.8759134572068908e-14, 3.4744511729337475e-13, 2.2609598148646134e-12, 8.6870651556605326e-12, 2.0397611395141141e-11, 2.8438685565462160e-11, 1.8756456560945225e-11], [-2.0007848526527887e-19, -2.8828887341394929e-17, -9.5186339036471153e-16, -1.3288796986157011e-14, -9.6962417263723337e-14, -4.0748400666841894e-13, -1.0234160101670825e-12, -1.4943029593051496e-12, -1.0110715544898051e-12], [4.1450303300539794e-21, 7.6842432238599059e-19, 3.0184112382777882e-17, 4.8149170580595395e-16, 3.9015699766070675e-15, 1.7790968755341076e-14, 4.7494387727125257e-14, 7.2300860894992664e-14, 5.0059912874713450e-14], [-8.4831230575508643e-23, -1.9912713749941070e-20, -9.1900767569862683e-19, -1.6574777795788247e-17, -1.4782128883648018e-16, -7.2597517911793536e-16, -2.0480034827237671e-15, -3.2370571559243919e-15, -2.2881548119517515e-15]],
        [[1.5056906527499596e-1, 1.2467009308341271e-1, 8.6441629226061690e-2, 5.1346417416905210e-2, 2.7019847791361158e-2, 1.3112581336849054e-2, 6.0755798163003120e-3, 2.6751468126848323e-3, 9.1819691096160859e-4], [-5.4669309464527614e-3, -1.0120651446822294e-2, -1.4686843507129380e-2, -1.5336791115232061e-2, -1.2374997761806006e-2, -8.2639139439560006e-3, -4.8080061860245995e-3, -2.4546245002622722e-3, -9.1103747080635752e-4], [1.1182352724656092e-4, 4.2690797205494116e-4, 9.8507581949537332e-4, 1.5053493664177485e-3, 1.6793607050498295e-3, 1.4645647835957073e-3, 1.0483994571719092e-3, 6.1887902886557222e-4, 2.4913928377163439e-4], [-2.3982290045608928e-6, -1.6086246770707144e-5, -5.4520243150284664e-5, -1.1523184936010983e-4, -1.6946964284593687e-4, -1.8620605228596715e-4, -1.6014710444163632e-4, -1.0783034477984472e-4, -4.6789898540405085e-5], [5.1754443150792108e-8, 5.5612716861978098e-7, 2.6490420160143275e-6, 7.4398874159284653e-6, 1.3940354756476570e-5, 1.8775151355570245e-5, 1.9006771400958562e-5, 1.4399412960734361e-5, 6.6860643029922482e-6], [-1.1059877314665806e-9, -1.8001853842184797e-8, -1.1651004745681031e-7, -4.2194027791848740e-7, -9.8132000057992682e-7, -1.5848395267105768e-6, -1.8559572479784226e-6, -1.5627209186330987e-6, -7.7111939670029142e-7], [2.3265944492331304e-11, 5.5232830904546196e-10, 4.7265047374020506e-9, 2.1550028516893538e-8, 6.0909004770361556e-8, 1.1582527486272858e-7, 1.5459449220494358e-7, 1.4311108413865989e-7, 7.4577826428889374e-8], [-4.8167278992243694e-13, -1.6192867683833081e-11, -1.7911170474741399e-10, -1.0078879745836031e-9, -3.4010385937870681e-9, -7.4978643725300772e-9, -1.1260294821608812e-8, -1.1351236430884109e-8, -6.2122227941231085e-9], [9.8146803242344331e-15, 4.5625987727727195e-13, 6.3981618966194416e-12, 4.3683471957939438e-11, 1.7331625258134131e-10, 4.3703346590904289e-10, 7.3022033209786060e-10, 7.9486129489869574e-10, 4.5456941434983378e-10], [-1.9718769544519419e-16, -1.2409480711072487e-14, -2.1690770670957565e-13, -1.7701887848596646e-12, -8.1476105379522204e-12, -2.3221807406910314e-11, -4.2739838716261162e-11, -4.9860404850648739e-11, -2.9664998216683849e-11], [3.9071565374460556e-18, 3.2690201163648366e-16, 7.0154069531497663e-15, 6.7529792156880412e-14, 3.5628341235872328e-13, 1.1356735176284012e-12, 2.2820655848966397e-12, 2.8342024259115816e-12, 1.7473589107351168e-12], [-7.6519299429618892e-20, -8.3631868202840215e-18, -2.1736282096724883e-16, -2.4383889477295722e-15, -1.4588384861165822e-14, -5.1513587169583533e-14, -1.1211678739297537e-13, -1.4735056605451810e-13, -9.3806183888248647e-14], [1.4795500542089732e-21, 2.0823930303827024e-19, 6.4732768302354828e-18, 8.3705101928221050e-17, 5.6234058209796526e-16, 2.1808431023082334e-15, 5.1041436965518070e-15, 7.0606550558897569e-15, 4.6267785080721157e-15], [-2.8345721487193340e-23, -5.0527624329412083e-21, -1.8566948478543393e-19, -2.7391046088272460e-18, -2.0474440872932845e-17, -8.6507589425262474e-17, -2.1627265928848524e-16, -3.1333182768521099e-16, -2.1073020779241302e-16]],
        [[1.4044759920858055e-1, 1.0732405815101087e-1, 6.3289559065507100e-2, 2.9434048857005828e-2, 1.1206756253660248e-2, 3.6972132309144902e-3, 1.1376510136274137e-3, 3.4710524301257580e-4, 9.3452006506251608e-5], [-4.6748849396355410e-3, -7.3496052009694940e-3, -8.8467680250964171e-3, -7.2985024340337603e-3, -4.3830766478194054e-3, -2.0719137341560039e-3, -8.3709192785052448e-4, -3.0785646539539522e-4, -9.1827139240632161e-5], [8.7370372809306646e-5, 2.7735329254889885e-4, 5.2438279890344639e-4, 6.2862578066969668e-4, 5.2627581730692318e-4, 3.3247067215437868e-4, 1.7073576516770978e-4, 7.5052100257574731e-5, 2.4853355534947965e-5], [-1.7207987498500061e-6, -9.4772692548005629e-6, -2.5979212918202399e-5, -4.2961137051028027e-5, -4.7816590954350851e-5, -3.8793078321862503e-5, -2.4590611413283616e-5, -1.2685859274051364e-5, -4.6226093113701421e-6], [3.4285125800559199e-8, 2.9897773620746348e-7, 1.1417354048510104e-6, 2.5079577066329951e-6, 3.5860280080717584e-6, 3.6272024602775202e-6, 2.7709093362388749e-6, 1.6488714855169769e-6, 6.5471742270504211e-7], [-6.7958080618046096e-10, -8.8745525784449684e-9, -4.5777914698186675e-8, -1.2981250494412273e-7, -2.3235296844459714e-7, -2.8628526045383197e-7, -2.5839150608894253e-7, -1.7469138390962511e-7, -7.4902317341573885e-8], [1.3291150355282394e-11, 2.5072187372747092e-10, 1.7035256609681048e-9, 6.0961766316399041e-9, 1.3377061498979626e-8, 1.9697212123823526e-8, 2.0655738042136450e-8, 1.5657723171707452e-8, 7.1909035698535635e-9], [-2.5653966916064773e-13, -6.7923224329710296e-12, -5.9523409341102727e-11, -2.6378764439529953e-10, -6.9731297632280166e-10, -1.2073298550556488e-9, -1.4499746746125319e-9, -1.2182366339487489e-9, -5.9497219677597015e-10], [4.8753388687786076e-15, 1.7739608539805578e-13, 1.9692599304938000e-12, 1.0634027048483230e-11, 3.3357190885226826e-11, 6.6963450403708836e-11, 9.0950564866915463e-11, 8.3840419862116285e-11, 4.3268323396049346e-11], [-9.1642957979979057e-17, -4.4844310456813820e-15, -6.2073339669587111e-14, -4.0268060232675835e-13, -1.4791393593171540e-12, -3.4003717433095715e-12, -5.1653322787442414e-12, -5.1775510680251123e-12, -2.8077006764262772e-12], [1.6949352341552342e-18, 1.1007041573599966e-16, 1.8732392840842433e-15, 1.4414550133608702e-14, 6.1271742591755812e-14, 1.5952988956826681e-13, 2.6835665988145414e-13, 2.9016696259904331e-13, 1.6451948063036796e-13], [-3.1194132008475710e-20, -2.6297117692022163e-18, -5.4328347621309533e-17, -4.9023449188736282e-16, -2.3857389475546008e-15, -6.9652594237270470e-15, -1.2859917275309937e-14, -1.4893005032339939e-14, -8.7895458068107519e-15], [5.6350205029454216e-22, 6.1278935950163060e-20, 1.5189771970268997e-18, 1.5905154759106372e-17, 8.7755238122443144e-17, 2.8469716470675456e-16, 5.7229406818995116e-16, 7.0532319897642916e-16, 4.3158485321435996e-16], [-1.0065094546210125e-23, -1.3943576803218677e-21, -4.1018837485234278e-20, -4.9350366368162271e-19, -3.0588221130351884e-18, -1.0933890605640454e-17, -2.3751644052936377e-17, -3.0968206827893658e-17, -1.9575331567165677e-17]],
        [[1.3173736798760109e-1, 9.4533215892331327e-2, 4.8984857550051608e-2, 1.8611292604440432e-2, 5.3449717516205376e-3, 1.2270948488338454e-3, 2.4729790607211183e-4, 4.9515556927615141e-5, 9.8247285069277031e-6], [-4.0501260629620726e-3, -5.5160110378784454e-3, -5.6456774970024418e-3, -3.8052880816059057e-3, -1.7584297649126818e-3, -5.9923810339029855e-4, -1.6602381093780094e-4, -4.1973874720410753e-5, -9.5308082052689911e-6], [6.9613791948717516e-5, 1.8737722718748191e-4, 2.9793223243221413e-4, 2.8842509245339236e-4, 1.8586987464515830e-4, 8.6031523316751407e-5, 3.1233839862269111e-5, 9.7980842788845236e-6, 2.5452587057975904e-6], [-1.2657980145943042e-6, -5.8413857226056393e-6, -1.3275215427900644e-5, -1.7613225723595361e-5, -1.5138137021825913e-5, -9.1257368794684880e-6, -4.1936682441171587e-6, -1.5934847621815232e-6, -4.6759337626160330e-7], [2.3381240735083617e-8, 1.6903213655209684e-7, 5.2963240107919992e-7, 9.3013259684975501e-7, 1.0310064759910822e-6, 7.8490920252865467e-7, 4.4437512351635238e-7, 2.0019230178708508e-7, 6.5491024362281963e-8], [-4.3180055600221195e-10, -4.6215537750220667e-9, -1.9415982563311337e-8, -4.3941928643558273e-8, -6.1259380192567041e-8, -5.7513294104131174e-8, -3.9246228888686613e-8, -2.0581691619255753e-8, -7.4173158121242079e-9], [7.8760136340940974e-12, 1.2070373264138267e-10, 6.6437580366388636e-10, 1.8968408408962972e-9, 3.2594385319975220e-9, 3.7011759977115850e-9, 2.9889803336783525e-9, 1.7961952485839201e-9, 7.0563813777496475e-10], [-1.4250438976575855e-13, -3.0323394669254167e-12, -2.1445741012999238e-11, -7.5890112436494436e-11, -1.5804526483406153e-10, -2.1352323905851844e-10, -2.0089988479440500e-10, -1.3646673831367217e-10, -5.7904655460695705e-11], [2.5266369646750965e-15, 7.3642227902544481e-14, 6.5811750755538477e-13, 2.8429625636726418e-12, 7.0717034823732420e-12, 1.1206493145111330e-11, 1.2117882025775757e-11, 9.1938755915459712e-12, 4.1795521381720241e-12], [-4.4866976316895913e-17, -1.7351703650895358e-15, -1.9310080926118773e-14, -1.0048264534285074e-13, -2.9473344771208885e-13, -5.4100146101596804e-13, -6.6426266134379900e-13, -5.5699904720712422e-13, -2.6936290807923923e-13], [7.7254895327441301e-19, 3.9786559912970359e-17, 5.4418445518409802e-16, 3.3705426008242956e-15, 1.1524837651228879e-14, 2.4229372641955007e-14, 3.3418830299723944e-14, 3.0681533154237802e-14, 1.5684895998996681e-14], [-1.3259107926428981e-20, -8.8969052158994253e-19, -1.4781327022253920e-17, -1.0780022229327858e-16, -4.2523653349135521e-16, -1.0135800086167495e-15, -1.5552658143021055e-15, -1.5503269949885595e-15, -8.3316053646174967e-16], [2.4061884003769154e-22, 1.9440802235021144e-20, 3.8808602218015319e-19, 3.2998026289522006e-18, 1.4874310889650933e-17, 3.9824883763065881e-17, 6.7388134934149976e-17, 7.2388277879014336e-17, 4.0693201383674414e-17], [-3.3866257045671178e-24, -4.1569400850516976e-22, -9.8672993670462897e-21, -9.6899652352183193e-20, -4.9465703807460811e-19, -1.4747657875107690e-18, -2.7294327382908297e-18, -3.1376512829704019e-18, -1.8367004657663833e-18]],
        [[1.2415002068881231e-1, 8.4806629296291668e-2, 3.9657753025039456e-2, 1.2781678797734970e-2, 2.8901343170958511e-3, 4.7815183443918572e-4, 6.3374643184466734e-5, 7.9443522583845786e-6, 1.0774074652763198e-6], [-3.5482100741473031e-3, -4.2575312913896351e-3, -3.7801180552583548e-3, -2.1440085427196781e-3, -7.8912636201290199e-4, -1.9935904888408049e-4, -3.7968213452028493e-5, -6.3384991805352269e-6, -1.0271347694741312e-6], [5.6413745795848921e-5, 1.3089854561803718e-4, 1.7899596633107024e-4, 1.4376296473476897e-4, 7.3299676468485700e-5, 2.5353037096286748e-5, 6.4903244023727210e-6, 1.3991154437022584e-6, 2.6949256528406633e-7], [-9.5172541964759470e-7, -3.7436440875232440e-6, -7.2096233850157261e-6, -7.8610569512395336e-6, -5.3379872177952670e-6, -2.4252381195625398e-6, -8.0274953487775118e-7, -2.1668845530427345e-7, -4.8720359670420560e-8], [1.6353853077695227e-8, 9.9858568644611415e-8, 2.6215784054763769e-7, 3.7613647423600300e-7, 3.2941075767150775e-7, 1.9056943665518629e-7, 7.9193023449644175e-8, 2.6086558284252210e-8, 6.7267214148832368e-9], [-2.8282543478891718e-10, -2.5256096566616803e-9, -8.8154787757252835e-9, -1.6235959570181427e-8, -1.7906446636138846e-8, -1.2883327312483969e-8, -6.5667404749425505e-9, -2.5834745732370736e-9, -7.5218555063644848e-10], [4.8118202257445642e-12, 6.1214658463569430e-11, 2.7815107311863025e-10, 6.4464342094237436e-10, 8.7837534393105771e-10, 7.7103103076404256e-10, 4.7281760640975874e-10, 2.1814079295275710e-10, 7.0746513803494071e-11], [-8.2490841402118674e-14, -1.4309031529256099e-12, -8.3133320700539943e-12, -2.3852554556626922e-11, -3.9517205413269513e-11, -4.1640991064260441e-11, -3.0219608391956092e-11, -1.6094687022953908e-11, -5.7463014318454644e-12], [1.3541649382594785e-15, 3.2418108164773473e-14, 2.3710855206767268e-13, 8.3029768442792225e-13, 1.6495465305096127e-12, 2.0575155580365106e-12, 1.7419107437215086e-12, 1.0563361114536784e-12, 4.1095486582627573e-13], [-2.2740938584495595e-17, -7.1391694121060343e-16, -6.4861743839475073e-15, -2.7381179320513249e-14, -6.4442755116208073e-14, -9.3973364426578166e-14, -9.1641288672471785e-14, -6.2515663778287597e-14, -2.6264580846771388e-14], [3.9521433670451951e-19, 1.5330788405709794e-17, 1.7089915051932280e-16, 8.6011433536381541e-16, 2.3720385283756554e-15, 3.9991376513402958e-15, 4.4414407206887110e-15, 3.3718438953953338e-15, 1.5177916792986283e-15], [-4.7474605580721454e-21, -3.2186616737950220e-19, -4.3529137575884486e-18, -2.5848519041947871e-17, -8.2701989816190180e-17, -1.5958140754533756e-16, -1.9978185442876329e-16, -1.6717201040227245e-16, -8.0065440972283038e-17], [1.2950774874323726e-22, 6.5992391878844913e-21, 1.0736966878840562e-19, 7.4572118759217209e-19, 2.7429982786851865e-18, 6.0019618013929702e-18, 8.3913332222677536e-18, 7.6725915851395005e-18, 3.8857705550206363e-18], [-1.5915745460209497e-24, -1.3300893564582094e-22, -2.5717818091725079e-21, -2.0699435774054658e-20, -8.6778893731375484e-20, -2.1344429383206218e-19, -3.3035915522500303e-19, -3.2743142823201211e-19, -1.7436652277398146e-19]],
        [[1.1747162498360715e-1, 7.7213428743096141e-2, 3.3298297205906539e-2, 9.4038579357151515e-3, 1.7445015389757207e-3, 2.1695141937032180e-4, 1.9345270841258654e-5, 1.4709485947532290e-6, 1.2496063333849570e-7], [-3.1385273804249017e-3, -3.3662566356718744e-3, -2.6342869789287876e-3, -1.2890860874258450e-3, -3.9063965089083587e-4, -7.5698285543244697e-5, -1.0087165943133872e-5, -1.0821783942025280e-6, -1.1626743976854082e-7], [4.6394718208125256e-5, 9.4120174705066087e-5, 1.1282000202993345e-4, 7.7034742481524020e-5, 3.1940522355388706e-5, 8.4680682725099542e-6, 1.5436891696418261e-6, 2.2238819461034945e-7, 2.9784606671225229e-8], [-7.2974712713496698e-7, -2.4819612365027975e-6, -4.1289469324931574e-6, -3.7827764045586461e-6, -2.0781192682640512e-6, -7.2598352102379104e-7, -1.7383174421990345e-7, -3.2392444130280633e-8, -5.2713213742013643e-9], [1.1687558694629736e-8, 6.1311127218484520e-8, 1.3741153426248847e-7, 1.6440152873024428e-7, 1.1611705247925540e-7, 5.1840131239713704e-8, 1.5809463671926276e-8, 3.6983284157408692e-9, 7.1433446301184019e-10], [-1.9081766407197670e-10, -1.4401294978214754e-9, -4.2521782863752055e-9, -6.4953919543139001e-9, -5.7686920638876997e-9, -3.2175169944960864e-9, -1.2202820299861871e-9, -3.4972716775948245e-10, -7.8575966762283180e-11], [3.0055376412034138e-12, 3.2515981528775098e-11, 1.2411063146745529e-10, 2.3755224135447535e-10, 2.6055740540950325e-10, 1.7823831368497663e-10, 8.2429840904684302e-11, 2.8355389228912985e-11, 7.2839342627023286e-12], [-4.9517365404680079e-14, -7.0937089985724187e-13, -3.4426758635551946e-12, -8.1364189668080791e-12, -1.0859882906441442e-11, -8.9708430009411667e-12, -4.9749930031345689e-12, -2.0183332049886266e-12, -5.8404765273170823e-13], [7.8398628076077418e-16, 1.5039035592991410e-14, 9.1450379034842229e-14, 2.6332980283357836e-13, 4.2218508557031128e-13, 4.1548272499422171e-13, 2.7230307966467521e-13, 1.2830686336114082e-13, 4.1290521674578529e-14], [-9.6114569548466476e-18, -3.1072910069879163e-16, -2.3384357382641232e-15, -8.1058306606757026e-15, -1.5431682222860312e-14, -1.7877297030032358e-14, -1.3668618905897246e-14, -7.3799059000429338e-15, -2.6117642621009709e-15], [2.8897648231261488e-19, 6.2446111134500731e-18, 5.7616335695692241e-17, 2.3841690923021896e-16, 5.3361017120970794e-16, 7.1992088599234514e-16, 6.3472807174766480e-16, 3.8798803736404573e-16, 1.4952797790454980e-16], [-1.0194426618109046e-21, -1.2396745548834861e-19, -1.3796936766560566e-18, -6.7318433272738510e-18, -1.7542538875988354e-17, -2.7293133523791702e-17, -2.7457536360362161e-17, -1.8797996638434995e-17, -7.8213655613898010e-18], [9.7267585275424896e-24, 2.3910405599010214e-21, 3.2023784326418902e-20, 1.8296994709500097e-19, 5.5046940039004868e-19, 9.7876839022201832e-19, 1.1127889006176670e-18, 8.4499993928977241e-19, 3.7668033242352383e-19], [-3.3705629469886113e-24, -4.4857369911408847e-23, -7.2110369944525279e-22, -4.7967497134940794e-21, -1.6528195933075384e-20, -3.3300043514703712e-20, -4.2399540688516809e-20, -3.5389534012662923e-20, -1.6784778235011525e-20]],
        [[1.1154006511659376e-1, 7.1150046256795954e-2, 2.8798081266604848e-2, 7.3243434151205681e-3, 1.1574247259828736e-3, 1.1318666401393487e-4, 7.0574668167388820e-6, 3.2283183938668790e-7, 1.5634570131740362e-8], [-2.7994852059508179e-3, -2.7176962396221685e-3, -1.8980939153479991e-3, -8.1784992593026049e-4, -2.1026316605345769e-4, -3.2416784396050673e-5, -3.1170777303884472e-6, -2.1321621095806665e-7, -1.4045928956105990e-8], [3.8645341392636070e-5, 6.9393014898524149e-5, 7.4104824951134780e-5, 4.3963611558879844e-5, 1.5215313846018089e-5, 3.1805502589915086e-6, 4.2150444546123362e-7, 4.0050508291697586e-8, 3.4812670669334674e-9], [-5.6978152537897415e-7, -1.6948952320402278e-6, -2.4765559495532056e-6, -1.9450784126298197e-6, -8.8476666999746258e-7, -2.4333600465990401e-7, -4.2756991773862026e-8, -5.4078115955478419e-9, -5.9869874939055435e-10], [8.4938063436146170e-9, 3.8946230806318752e-8, 7.5775185620289601e-8, 7.7030294873106916e-8, 4.4795165816177097e-8, 1.5734843635828759e-8, 3.5530767243931693e-9, 5.7863484351211119e-10, 7.9148699166508917e-11], [-1.3273007576705094e-10, -8.5255714631114279e-10, -2.1639698439454676e-9, -2.7915400078620930e-9, -2.0339585279003980e-9, -8.9345602451899055e-10, -2.5327150492301861e-10, -5.1723840828451236e-11, -8.5214922125490468e-12], [1.9335788456376687e-12, 1.7999986854278596e-11, 5.8626265762382073e-11, 9.4231523483281698e-11, 8.4574199979633942e-11, 4.5655037516244872e-11, 1.5935546560191326e-11, 3.9920411398063252e-12, 7.7528274678433081e-13], [-2.7842444428284161e-14, -3.6783317643434272e-13, -1.5146730378367865e-12, -2.9928242039674214e-12, -3.2640882077747785e-12, -2.1340444829270761e-12, -9.0221572942721368e-13, -2.7206017173705130e-13, -6.1149823349568920e-14], [6.3142504271994008e-16, 7.2904091759498894e-15, 3.7430765849932113e-14, 9.0092456596571383e-14, 1.1806901397441856e-13, 9.2322567177324987e-14, 4.6603646052169337e-14, 1.6639949706837963e-14, 4.2606390494234442e-15], [4.9281784353496949e-19, -1.4304890241530178e-16, -9.0171348828377684e-16, -2.5933503390623289e-15, -4.0341073645579019e-15, -3.7294060082885724e-15, -2.2192325754860181e-15, -9.2467369540325264e-16, -2.6603081503699815e-16], [1.8446845571792328e-19, 2.6724624446775181e-18, 2.0737863170892146e-17, 7.1425480172041356e-17, 1.3087499986310864e-16, 1.4162360234606672e-16, 9.8210547130386502e-17, 4.7135356557599804e-17, 1.5055189825340604e-17], [-5.3953100052491280e-21, -4.9620160053817730e-20, -4.6495014928921524e-19, -1.8942276366800572e-18, -4.0509449859576120e-18, -5.0834081086993014e-18, -4.0651782678696683e-18, -2.2211677139640371e-18, -7.7932670297612718e-19], [-1.9452130744738468e-22, 9.5401777953594464e-22, 1.0336337099356604e-20, 4.8583101264169419e-20, 1.2008388752775338e-19, 1.7322434578798047e-19, 1.5821449412545080e-19, 9.7375221619173909e-20, 3.7180970890183417e-20], [-3.5201048576878316e-24, -1.5676660708845941e-23, -2.1598040748626390e-22, -1.2013778016545836e-21, -3.4158677101694574e-21, -5.6191531975201872e-21, -5.8083579154520588e-21, -3.9870400164085342e-21, -1.6427224285443891e-21]],
        [[1.0623011316885815e-1, 6.6212101775067256e-2, 2.5513277825705799e-2, 5.9788609712181450e-3, 8.3193525886464784e-4, 6.6870553562483866e-5, 3.0638180128508111e-6, 8.6034122322383433e-8, 2.1707270427482451e-9], [-2.5155481882900639e-3, -2.2344727583994011e-3, -1.4063745846166070e-3, -5.4211833982990892e-4, -1.2132839877161855e-4, -1.5424909778247293e-5, -1.1138610017244096e-6, -4.9320308919721872e-8, -1.8511170220063691e-9], [3.2543309987645505e-5, 5.2297908357510539e-5, 5.0445712846461814e-5, 2.6507383236765410e-5, 7.8437184764739354e-6, 1.3303486355335046e-6, 1.3186666410615227e-7, 8.3011757946748145e-9, 4.3796549725207490e-10], [-4.5281943465359244e-7, -1.1877746316346566e-6, -1.5462589309298431e-6, -1.0599316512526043e-6, -4.0800733578924700e-7, -9.0583087868760130e-8, -1.1943028136757702e-8, -1.0229638958565499e-9, -7.2421385417423139e-11], [6.2521253772021331e-9, 2.5499274959833958e-8, 4.3721105455279054e-8, 3.8405610720824340e-8, 1.8756235419637941e-8, 5.2957724135315124e-9, 9.0023204572711411e-10, 1.0127758852507135e-10, 9.2614610603600934e-12], [-9.3343564224823562e-11, -5.2190043491919078e-10, -1.1556409724382037e-9, -1.2797408014288867e-9, -7.7911574696033773e-10, -2.7453896225585381e-10, -5.8865635411671015e-11, -8.4649876999014110e-12, -9.6925144578799432e-13], [1.4460967665521734e-12, 1.0318451168525290e-11, 2.9050844980077521e-11, 3.9914445067782639e-11, 2.9832950416828030e-11, 1.2911364792669475e-11, 3.4283642159086555e-12, 6.1603897090697228e-13, 8.6053315342675464e-14], [-6.5790011316032083e-15, -1.9987240194093235e-13, -7.0884767132083816e-13, -1.1817426376709250e-12, -1.0672791994908412e-12, -5.5925096240174739e-13, -1.8101672406147844e-13, -3.9861972765760347e-14, -6.6447343207656503e-15], [6.9610219348950515e-16, 3.6430462475220407e-15, 1.6054570954223736e-14, 3.2994518646088480e-14, 3.5890528614182360e-14, 2.2540884934643395e-14, 8.7750770798771970e-15, 2.3283366388950104e-15, 4.5444093760161051e-16], [-8.2194976021184930e-20, -6.8764499737711123e-17, -3.6758138832536255e-16, -8.9069139716981803e-16, -1.1462309212729516e-15, -8.5264656208550043e-16, -3.9430930305639647e-16, -1.2417334255588443e-16, -2.7913209195360412e-17], [-2.9747867147323519e-19, 1.2654151277922397e-18, 8.1515065902001090e-18, 2.3100641629917733e-17, 3.4887342300619865e-17, 3.0452607258072549e-17, 1.6545592362206408e-17, 6.1007260134816399e-18, 1.5568350968329658e-18], [-1.6606882437081271e-20, -1.8583737350340466e-20, -1.5963635192045866e-19, -5.7042039133130055e-19, -1.0149785219819207e-18, -1.0319598214661157e-18, -6.5214997076912325e-19, -2.7811083112052507e-19, -7.9549261543338162e-20], [-1.9662866342619115e-22, 4.0937915571597833e-22, 3.5886252048690694e-21, 1.3903948861625477e-20, 2.8413407382211242e-20, 3.3322138302333252e-20, 2.4261824671339740e-20, 1.1832967862957702e-20, 3.7512865138756170e-21], [5.3704359512922297e-24, -7.3636689865753860e-24, -7.3068400548087653e-23, -3.2546946004475896e-22, -7.6492878690379446e-22, -1.0276441343226042e-21, -8.5443099964723775e-22, -4.7159668076088073e-22, -1.6401378736975008e-22]],
        [[1.0144327064574699e-1, 6.2120826824630638e-2, 2.3052709851510668e-2, 5.0726809780357860e-3, 6.3947768399326416e-4, 4.4018775407761787e-5, 1.5652366959503392e-6, 2.8314139791034954e-8, 3.4801732625417982e-10], [-2.2753662244728781e-3, -1.8668813180628032e-3, -1.0666773694183345e-3, -3.7214500397779099e-4, -7.4035226963375985e-5, -8.0190995592291067e-6, -4.5446899094294263e-7, -1.3525790389795175e-8, -2.7401675234767071e-10], [2.7654117987429721e-5, 4.0186987938256798e-5, 3.5431593585432644e-5, 1.6772821750370315e-5, 4.3369829748345734e-6, 6.1341656407468897e-7, 4.6975121953230721e-8, 2.0020730465210060e-9, 6.0693491895714097e-11], [-3.6585317260882581e-7, -8.5152696532912388e-7, -9.9958214746460189e-7, -6.0758087831893859e-7, -2.0189789230420129e-7, -3.7093420944947055e-8, -3.7717233509465483e-9, -2.2169707940037700e-10, -9.5079826012405124e-12], [4.7299734631538301e-9, 1.7143919585352293e-8, 2.6228205377180729e-8, 2.0220797344470270e-8, 8.4513635914356542e-9, 1.9610143863174030e-9, 2.5656084113533940e-10, 2.0053690412546318e-11, 1.1625788914539854e-12], [-5.8453161355491547e-11, -3.3021359101875976e-10, -6.4880893295229414e-10, -6.2383299122448545e-10, -3.2224035126252024e-10, -9.2796750218161308e-11, -1.5312713341335109e-11, -1.5501545428994800e-12, -1.1716319272806183e-13], [1.5480749699200885e-12, 6.0438095875933054e-12, 1.4788078052960777e-11, 1.7822599372602119e-11, 1.1336186884447623e-11, 4.0089511193258433e-12, 8.2134186046897442e-13, 1.0534717011489088e-13, 1.0073241936704733e-14], [1.1817284039614319e-14, -1.1444129100456943e-13, -3.5509208498152766e-13, -5.0002988166520507e-13, -3.7776036998541069e-13, -1.6083620984016241e-13, -4.0253717377919038e-14, -6.4163676459187876e-15, -7.5662145330797354e-16], [2.8902177852633087e-16, 1.9245722085975789e-15, 7.3730327799430975e-15, 1.2937525389541334e-14, 1.1805669280416092e-14, 6.0292319071180217e-15, 1.8226795836644511e-15, 3.5512015955036826e-16, 5.0520424012839114e-17], [-2.7697587590007640e-17, -3.0025285591795611e-17, -1.4279660953992444e-16, -3.2005579527862871e-16, -3.5115374618272109e-16, -2.1310358869843740e-16, -7.6929591262134051e-17, -1.8047624853727784e-17, -3.0387702890711243e-18], [-1.0511009814861733e-18, 7.5094162602881169e-19, 3.8161732269950252e-18, 8.1844964575136464e-18, 1.0093719065038511e-17, 7.1496403440580081e-18, 3.0471688846351272e-18, 8.4910685418623592e-19, 1.6638759095259260e-19], [-1.1214475365021570e-20, -7.7018011426239508e-21, -5.8335761526035695e-20, -1.8359314986697036e-19, -2.7488417874327132e-19, -2.2817629283937770e-19, -1.1386483831400705e-19, -3.7225595170106869e-20, -8.3641707680961175e-21], [6.2698128755423966e-22, 4.0451052768165338e-23, 9.0852916800221139e-22, 4.0999690413312476e-21, 7.2441806974313487e-21, 6.9659452821565306e-21, 4.0320365830389857e-21, 1.5289400673871859e-21, 3.8873537282222697e-22], [2.9061828202229345e-23, -7.6480588931075010e-24, -3.9988502943793834e-23, -1.0053968515217411e-22, -1.8607650071765402e-22, -2.0387767958231857e-22, -1.3565371244044628e-22, -5.9021689582239783e-23, -1.6777266337488082e-23]],
        [[9.7100726922302143e-2, 5.8679192058077464e-2, 2.1169279178515563e-2, 4.4428252684421412e-3, 5.1978195013759595e-4, 3.1779441198376188e-5, 9.2614541474322605e-7, 1.1572438452532684e-8, 6.7930020610227804e-11], [-2.0704828287543962e-3, -1.5820512232760711e-3, -8.2494641411085207e-4, -2.6244411681000737e-4, -4.7140638561110447e-5, -4.4722164299627683e-6, -2.0775705807599300e-7, -4.3902996507549267e-9, -4.7215101249852201e-11], [2.3686238299092861e-5, 3.1419369217767874e-5, 2.5580570872072889e-5, 1.1075361982460443e-5, 2.5524882695314293e-6, 3.0883619217037662e-7, 1.8887735600761222e-8, 5.6436544277644734e-10, 9.5326630320732948e-12], [-2.9739086172360137e-7, -6.2315246159964658e-7, -6.6740885948334502e-7, -3.6465624838219545e-7, -1.0640662512473853e-7, -1.6550570365088316e-8, -1.3364845289241338e-9, -5.5359106366439486e-11, -1.3867711693036205e-12], [3.9596458356866703e-9, 1.1763038883267352e-8, 1.6116912528645632e-8, 1.1091218815560134e-8, 4.0500787938275681e-9, 7.9093073952146495e-10, 8.1767858549294586e-11, 4.5239515030047285e-12, 1.5964549116608377e-13], [-1.7505636132942394e-11, -2.1746331803829734e-10, -3.9035624179417257e-10, -3.2604296159723462e-10, -1.4379510197728040e-10, -3.4332788401996518e-11, -4.4448054253998266e-12, -3.2022568029219128e-13, -1.5302682748507721e-14], [1.7987714357333760e-12, 3.5765705674152711e-12, 7.5592685436554776e-12, 8.2587473787133298e-12, 4.5909086144126136e-12, 1.3565620917698255e-12, 2.1861334917977311e-13, 2.0135899366795530e-14, 1.2612581621495280e-15], [-3.1862520474778018e-15, -6.5040334643011567e-14, -1.7649285526648537e-13, -2.2019164731574659e-13, -1.4302202964218938e-13, -5.0448455864091841e-14, -9.9130508591076107e-15, -1.1448293358054135e-15, -9.1385175874962035e-17], [-1.4573428104131100e-15, 1.2971815744256135e-15, 4.4253457247848048e-15, 5.7723715791836723e-15, 4.2435324953602706e-15, 1.7638186339751282e-15, 4.1789111393509928e-16, 5.9577393593970922e-17, 5.9156688656679073e-18], [-6.4415437554099069e-17, -7.6448289381042578e-18, -3.5796237983550461e-17, -1.1171723263128161e-16, -1.1381582301139971e-16, -5.7893021910113765e-17, -1.6497553893725824e-17, -2.8647100050341532e-18, -3.4638203425980764e-19], [-2.4122705888939229e-19, 3.1198065807431231e-19, 1.5092362080307500e-18, 2.9740862312342903e-18, 3.1336265430000290e-18, 1.8273853203528045e-18, 6.1477863723359232e-19, 1.2821808722450012e-19, 1.8525614124584854e-20], [6.3366435577388530e-20, -1.5240631891970804e-20, -6.1081717199889363e-20, -7.9269909617598091e-20, -8.2801118201858121e-20, -5.5011015337998037e-20, -2.1699922180690307e-20, -5.3728824049045660e-21, -9.1222092107136243e-22], [2.4498714797489005e-21, -3.1672232973389654e-22, -8.7666796883366421e-22, 7.8620480911627887e-22, 1.8976853264660178e-21, 1.5738346345504426e-21, 7.2839421234242391e-22, 2.1181619104488644e-22, 4.1628881316606907e-23], [2.0094364580305051e-23, -2.4147001317851038e-24, -1.9742253493640650e-23, -3.5075968374750833e-23, -4.9571533660302639e-23, -4.3941837683665341e-23, -2.3336169795376331e-23, -7.8785844162643545e-24, -1.7677663694136913e-24]],
        [[9.3138702252393426e-2, 5.5744822785785349e-2, 1.9701408611765097e-2, 3.9945243592690085e-3, 4.4253161759052579e-4, 2.4800253134363120e-5, 6.2312727432142450e-7, 5.8326924103335968e-9, 1.7179176972660107e-11], [-1.8942026588498627e-3, -1.3577110254931876e-3, -6.4849018757871224e-4, -1.8876255271036796e-4, -3.0912087802931410e-5, -2.6235052424811512e-6, -1.0384786562324305e-7, -1.6599981486651803e-9, -9.8187616865605232e-12], [2.0493348418969175e-5, 2.4940878428214398e-5, 1.8889258350118814e-5, 7.5790269588998472e-6, 1.5857568267312148e-6, 1.6814780308703688e-7, 8.4845184024736571e-9, 1.8551005431268438e-10, 1.7508036510931451e-12], [-2.3464374151008976e-7, -4.6561161812195356e-7, -4.6354257678711954e-7, -2.3035571913506813e-7, -5.9752761088783413e-8, -8.0059902323686340e-9, -5.2714713303684319e-10, -1.5923468040911186e-11, -2.3067253590656804e-13], [3.9979895779052060e-9, 8.1479953346983732e-9, 9.8024292630928697e-9, 6.1476416239609240e-9, 2.0175133684793047e-9, 3.4174280511590781e-10, 2.8833350036431619e-11, 1.1643300605830326e-12, 2.4528045034635600e-14], [1.7288826375225381e-11, -1.4899408560315641e-10, -2.5315237068186849e-10, -1.8399949315527537e-10, -6.9396622390503842e-11, -1.3866131078634630e-11, -1.4338567062457899e-12, -7.4936955451452092e-14, -2.2021349576524651e-15], [7.3656094781610559e-13, 2.3035025850735511e-12, 4.4550129319061561e-12, 4.2013647778709378e-12, 2.0091522116414996e-12, 4.9938626915012372e-13, 6.4408755605901035e-14, 4.3241667550275499e-15, 1.7180062201231244e-16], [-8.1279414873879802e-14, -2.7091747245743167e-14, -4.9894325544127347e-14, -8.3217045532709514e-14, -5.4426287124422688e-14, -1.6920300145395974e-14, -2.6890134752369422e-15, -2.2778633487696216e-16, -1.1881513199119561e-17], [-2.9719715156670254e-15, 1.0476349296881033e-15, 3.4578507612397531e-15, 3.1195640096177806e-15, 1.7143845047954672e-15, 5.6705065716175322e-16, 1.0576274996051594e-16, 1.1072449208215877e-17, 7.3905384668061897e-19], [1.3857864471701835e-17, -1.2381891832632139e-17, -4.1530756155039992e-17, -5.5443884884027836e-17, -4.1571082157253979e-17, -1.7163870199323976e-17, -3.8869214945993509e-18, -5.0025440420301248e-19, -4.1808564913791061e-20], [4.6929029532839943e-18, -5.9344869066956315e-19, -1.9855402513674723e-18, -1.5990412409143917e-20, 8.4121741883825306e-19, 4.9242908849093021e-19, 1.3553835184733823e-19, 2.1165485048311894e-20, 2.1700861032738683e-21], [1.2616178913230092e-19, -1.9627409132311733e-20, -8.0765738949066563e-20, -5.5952904125628918e-20, -3.1187582490948339e-20, -1.4775097978936751e-20, -4.5311420017538590e-21, -8.4287995573670641e-22, -1.0409399793143783e-22], [-2.1397105274999713e-21, 4.9383012341447738e-22, 1.3791113047516770e-21, 9.1757047244204403e-22, 6.4280648962676596e-22, 3.8918086503872308e-22, 1.4323731783288102e-22, 3.1706150155396276e-23, 4.6420340844767235e-24], [-2.3601473971646462e-22, 3.6938072479569406e-23, 1.2744063022079700e-22, 4.7901426822372923e-23, -3.6710091134518130e-24, -9.5127370707799575e-24, -4.3411815054013218e-24, -1.1302903202798270e-24, -1.9315656407840308e-25]],
        [[8.9506113355656978e-2, 5.3212661305353713e-2, 1.8539578923841579e-2, 3.6698943936111695e-3, 3.9145010826271804e-4, 2.0648171695504601e-5, 4.6765539288160523e-7, 3.5580504298783853e-9, 5.9479488362845627e-12], [-1.7404033611201426e-3, -1.1785250843949556e-3, -5.1730847820703866e-4, -1.3776253172814814e-4, -2.0636038682298229e-5, -1.5871738362106570e-6, -5.5169856957527541e-8, -7.0925388613131473e-10, -2.5187666011817949e-12], [1.8073414609063869e-5, 2.0046584568271565e-5, 1.4118710079906539e-5, 5.2995095394642817e-6, 1.0239076884930545e-6, 9.7475991573206948e-8, 4.1960935908506007e-9, 7.0448465565141981e-11, 3.8674638264889128e-13], [-1.6789597912469433e-7, -3.5627587617827617e-7, -3.4167299615758763e-7, -1.5656854950653077e-7, -3.6378569727094687e-8, -4.2358694757160576e-9, -2.3131302850266115e-10, -5.2608743992682929e-12, -4.4874364901692606e-14], [4.2880246957601005e-9, 5.6766432048154897e-9, 5.7517364212311207e-9, 3.3373731818218991e-9, 1.0151696022233916e-9, 1.5448081606769548e-10, 1.1054040363606155e-11, 3.3973685110219243e-13, 4.3124853911140304e-15], [-1.1271955875659052e-12, -9.9630109435870898e-11, -1.5255750954987831e-10, -1.0179474374633794e-10, -3.4472083968476413e-11, -5.9769240716183703e-12, -5.0881820036739537e-13, -1.9855715338479747e-14, -3.5652276839480850e-16], [-2.4919387960704223e-12, 1.9081351295530903e-12, 4.2431386968179068e-12, 2.9456822651484684e-12, 1.0617020242337129e-12, 2.0787001480185638e-13, 2.1143117429220044e-14, 1.0464950465390027e-15, 2.5940063750624964e-17], [-1.2511468251373291e-13, -6.2585135992611774e-15, 1.6803502159368387e-14, -1.9054714837871832e-14, -1.9155128545744736e-14, -5.8591264073264681e-15, -7.9225834958590700e-16, -5.0593347023213149e-17, -1.6908512906088706e-18], [1.6088477531755746e-15, 8.2514756231927219e-17, 4.9386464360282196e-17, 7.1592511036915917e-16, 5.7644756339420475e-16, 1.8714967639552748e-16, 2.9213168450513637e-17, 2.2886032102350404e-18, 9.9997347001300648e-20], [2.3355136249278795e-16, -3.9393188779389122e-17, -1.4601715220981145e-16, -8.1496341872496962e-17, -2.6054505835907019e-17, -6.2593560453487040e-18, -1.0253515023061126e-18, -9.6757267014853517e-20, -5.4151187287415127e-21], [3.2163902103655913e-18, -2.6697280603745934e-19, -1.4908601875397282e-18, -4.3187966959449099e-19, 1.8278490441963234e-19, 1.3435335031642855e-19, 3.2200659291566839e-20, 3.8346114246769731e-21, 2.7060398861368023e-22], [-2.8252659034140276e-19, 4.4833986420500250e-20, 1.5178033091986860e-19, 5.8815952280182899e-20, 2.9031600199812538e-21, -3.2888292187022305e-21, -1.0116975664607711e-21, -1.4454101094696320e-22, -1.2558958363410423e-23], [-1.1928295330121868e-20, 1.5870963877658453e-21, 6.6850374104121599e-21, 3.2888414085701959e-21, 7.7563415392379835e-22, 1.5083011148128121e-22, 3.2222191219237754e-23, 5.1767565492873529e-24, 5.4404810549160755e-25], [1.2932769980639610e-22, -3.4120551162068612e-23, -7.3186857986462319e-23, -2.5797404656993126e-23, -5.3302279177429642e-24, -2.3127818769803645e-24, -8.5996128629482292e-25, -1.7503212563943074e-25, -2.2066016813560736e-26]],
        [[8.6164319633353412e-2, 5.1003445396452973e-2, 1.7605902549906588e-2, 3.4313697900702301e-3, 3.5715246074835764e-4, 1.8117305306967635e-5, 3.8380090104470053e-7, 2.5529687574353014e-9, 2.8716821111768218e-12], [-1.6027366653393050e-3, -1.0338452071052584e-3, -4.1938998130809459e-4, -1.0210458463219204e-4, -1.3959014986258728e-5, -9.7622845078352177e-7, -3.0322730604412936e-8, -3.2899802089338928e-10, -7.8765270702437317e-13], [1.6456264559009511e-5, 1.6258349606461819e-5, 1.0488342744570691e-5, 3.6858735698206205e-6, 6.6612320258487260e-7, 5.8280726484406105e-8, 2.2181761013966410e-9, 3.0217911519245788e-11, 1.0432203195071911e-13], [-1.0370148143695773e-7, -2.7897302399620125e-7, -2.6842126069886612e-7, -1.1578598521000259e-7, -2.4422267113274873e-8, -2.4953693229557648e-9, -1.1429423399854691e-10, -2.0029548672139418e-12, -1.0424394348359635e-14], [3.4475203884898058e-9, 4.1238762214192203e-9, 3.7371639048645411e-9, 1.9672023065963900e-9, 5.4442299051217176e-10, 7.4275144354525674e-11, 4.5830530564090728e-12, 1.1120214370649973e-13, 8.8247995057151769e-16], [-8.9255040129159676e-11, -5.6909221034158025e-11, -4.9755919643887053e-11, -3.7572557781192772e-11, -1.4142190273677193e-11, -2.4560358639906940e-12, -1.8890067672399300e-13, -5.8666907989559755e-15, -6.6125570104519462e-17], [-4.0140304282526765e-12, 1.5690415414320542e-12, 3.9614532857720148e-12, 2.3087933196696645e-12, 6.5691335931061306e-13, 1.0008126976123089e-13, 7.8764922411388485e-15, 2.8746682508191317e-16, 4.4259642078650520e-18], [5.3739165508399884e-14, -2.3624292057623099e-14, -5.9865078300101194e-14, -3.9140032934905147e-14, -1.3503566314978038e-14, -2.6136112418165822e-15, -2.6467168600302227e-16, -1.2589232327842342e-17, -2.6785973315432735e-19], [8.2730043246966820e-15, -9.3471472120997011e-16, -4.0739392991193064e-15, -1.5927369499367241e-15, -1.1983845162890616e-16, 3.9472058733774797e-17, 7.9541721127084295e-18, 5.1854519941963766e-19, 1.4878727001565573e-20], [1.5855076997726890e-17, -7.6662490748292669e-19, -1.7105809569769987e-17, -1.7387654214107734e-17, -8.3513741504102850e-18, -2.1543454717323088e-18, -2.9692342322943292e-19, -2.0883706112779431e-20, -7.6422008009049129e-22], [-1.3840296884675665e-17, 2.0261879623322693e-18, 7.8076612104702291e-18, 3.7025733291340363e-18, 7.7136796428661376e-19, 9.6304127816807263e-20, 9.9721256454967390e-21, 7.7872050708619967e-22, 3.6413356103581064e-23], [-2.1786123409934698e-19, 1.8911089232687341e-20, 1.1817895246428670e-19, 5.9327954758699430e-20, 1.0610455738463278e-20, 9.0020669057934042e-23, -2.0265641951560594e-22, -2.6584825182016267e-23, -1.6200973844708442e-24], [2.0253899282729603e-20, -3.0986174868126270e-21, -1.1192685070345713e-20, -4.9260428691377831e-21, -8.0213619360988965e-22, -3.0763351568778570e-23, 5.7692562791580961e-24, 9.1418603277345784e-25, 6.7765515418098724e-26], [6.5527009357232942e-22, -6.9903751547302361e-23, -3.6315746077905486e-22, -1.8326082126490634e-22, -3.8592420675044043e-23, -4.0517825156408972e-24, -3.1626038303355125e-25, -3.1005978200597347e-26, -2.6643544733782102e-27]],
        [[8.3087109628328944e-2, 4.9055963119181861e-2, 1.6841515798183048e-2, 3.2525987420566134e-3, 3.3372882295440645e-4, 1.6548533585809513e-5, 3.3728377476279187e-7, 2.0773138768690294e-9, 1.8557206579720423e-12], [-1.4752915388701860e-3, -9.1612197800069614e-4, -3.4739688295594197e-4, -7.7680058965032818e-5, -9.6708215013204285e-6, -6.1255831137561451e-7, -1.7048026821177031e-8, -1.6011502316385174e-10, -2.8604565959992867e-13], [1.5469574991456666e-5, 1.3274882435003445e-5, 7.6077826106602478e-6, 2.4689849919620968e-6, 4.1838814912097906e-7, 3.4205181635230904e-8, 1.1893480670458415e-9, 1.3937974687726960e-11, 3.3809421059480907e-14], [-6.7038491385341219e-8, -2.2033102415137760e-7, -2.1224225518734636e-7, -8.7784889522820897e-8, -1.7255375454530167e-8, -1.5924010855553594e-9, -6.3023222475263531e-11, -8.8080641344869141e-13, -2.9440112506021553e-15], [9.6342155162356096e-10, 3.2931204472796163e-9, 3.4865495375698932e-9, 1.6527385859683007e-9, 3.8599685539941946e-10, 4.3774839033555892e-11, 2.2106706690920477e-12, 4.1684831696671043e-14, 2.1280131534004822e-16], [-1.4101364034371634e-10, -3.0048033762877801e-11, 1.2109811470887114e-11, -5.9292098035553814e-13, -3.4048136837278008e-12, -8.3526484748112709e-13, -6.7528678574494755e-14, -1.8473711543493749e-15, -1.4100223654824041e-17], [5.0978490320733451e-13, 5.9172702298975848e-13, 8.0234579860603800e-13, 6.1414227744193564e-13, 2.2342774195464080e-13, 3.8036020726083140e-14, 2.8852405338495184e-15, 8.6834792270717108e-17, 8.6609154768270816e-19], [2.2194667235236343e-13, -3.9522912321063177e-14, -1.4065829326935290e-13, -7.1456582955472837e-14, -1.6159117545552582e-14, -1.8898870588492607e-15, -1.1874080634255773e-16, -3.7161885466805333e-18, -4.8287987436787581e-20], [-3.8745559420762559e-16, 2.7275474257602032e-16, 5.0230159530711877e-16, 3.0524254626405429e-16, 1.1132460184689917e-16, 2.4242686287233415e-17, 2.6911260238399075e-18, 1.3030957899997040e-19, 2.4644706656970900e-21], [-3.9702668438061874e-16, 5.1499577883425502e-17, 2.1543867293477414e-16, 9.8072962444184798e-17, 1.6667459730392090e-17, 8.4909497761168148e-19, -3.9543852389953757e-20, -4.4730564075624771e-21, -1.1843437771350991e-22], [5.1384327301692494e-19, -3.0185956234180070e-19, -2.2310252670724602e-19, 1.2700264171765087e-19, 1.0962013592826285e-19, 2.7137948774434835e-20, 3.1095852372895433e-21, 1.8093057985454301e-22, 5.3887259758953522e-24], [6.9647043394391109e-19, -9.2172448792755980e-20, -3.8682060426704647e-19, -1.8326688895220874e-19, -3.5415481594483973e-20, -3.1597037249692663e-21, -1.5434667725577721e-22, -6.4310725134653939e-24, -2.2804277681952914e-25], [-3.9785454630618983e-22, 6.8381437763208052e-22, 2.5416726197141399e-22, -2.8834549425724616e-22, -1.5229779225246921e-22, -1.9482491486954015e-23, 1.8239074819664889e-25, 1.5160480534171483e-25, 8.9924101065299199e-27], [-1.2180607956453367e-21, 1.5715026023607720e-22, 6.7440526780239492e-22, 3.1961313859607509e-22, 6.0569297341568058e-23, 4.7849933259683758e-24, 1.1150371022524596e-25, -3.9817692607460882e-27, -3.4066111346093824e-28]],
        [[8.0257788100455504e-2, 4.7322149917083879e-2, 1.6200201121738443e-2, 3.1139727567540603e-3, 3.1715003876346561e-4, 1.5544268104847210e-5, 3.1067678220783073e-7, 1.8416430095207996e-9, 1.4724976312756162e-12], [-1.3546909227762268e-3, -8.1964546494355251e-4, -2.9575491977540668e-4, -6.1691165661802034e-5, -7.0509759719142811e-6, -4.0447429660377622e-7, -1.0040195155046343e-8, -8.1770593705270017e-11, -1.1486605945307489e-13], [1.4672053135158979e-5, 1.0928775667478177e-5, 5.4035731905537547e-6, 1.5747073974380421e-6, 2.4668802581101861e-7, 1.8863617815148133e-8, 6.1022035587200425e-10, 6.4379591147403156e-12, 1.2305765151034498e-14], [-7.1590185640909161e-8, -1.7201596070271160e-7, -1.5469495743289205e-7, -6.1256315790023084e-8, -1.1472617740669400e-8, -9.9207871038281565e-10, -3.5660990945736897e-11, -4.2460655798559364e-13, -1.0041604020607814e-15], [-1.2894664754135510e-9, 2.7560387505472491e-9, 3.6394103363301858e-9, 1.6447046188026769e-9, 3.3918503420693917e-10, 3.2490959635133290e-11, 1.3300730644073062e-12, 1.9097046531808242e-14, 6.2658882766667193e-17], [-6.7316700656798211e-11, -2.6680915226357050e-11, -7.7256775647788019e-12, -5.8236767162975323e-12, -2.5561666225862224e-12, -4.4051006151106595e-13, -2.9217615733820687e-14, -6.5127263935537766e-16, -3.4549715174425704e-18], [4.7395477075848927e-12, -1.6934452984823723e-13, -1.9290791001256397e-12, -7.9497036748938182e-13, -9.9306686455641317e-14, 5.7009966110526671e-16, 6.5132402247102032e-16, 2.4247104241338581e-17, 1.8876258582452439e-19], [3.6166879292097329e-14, -9.8256724135985504e-15, -3.0716696840549334e-14, -1.8015081027356722e-14, -4.8920512559489167e-15, -6.6772987944751326e-16, -4.3537320945223150e-17, -1.1708140344040289e-18, -1.0028588667989045e-20], [-8.4169446473084586e-15, 1.1906252107144755e-15, 4.8255238676546270e-15, 2.3350602683665384e-15, 4.7151561718106663e-16, 4.4742747961700811e-17, 2.0705045046845274e-18, 4.7535091469159621e-20, 4.7893181061745253e-22], [4.4849783315361473e-17, -1.0367499299185136e-17, -2.7412151406388878e-17, -1.1845469641258018e-17, -2.2944836166127376e-18, -2.7717700590889830e-19, -2.4609981534610737e-20, -1.1706754574844063e-21, -2.0391430709528757e-23], [1.3956140788857253e-17, -1.7344921471698415e-18, -7.6911809445194632e-18, -3.6614669291155637e-18, -6.9320814819272756e-19, -5.3801231164384598e-20, -1.2159352592649170e-21, 2.1054362629999647e-23, 8.3848305880819475e-25], [-2.5753703463501213e-19, 4.0597542429463172e-20, 1.4234284892826171e-19, 6.1940594775827632e-20, 1.0119156848395280e-20, 5.5609071119234837e-22, -6.5011699625605290e-24, -1.2984333242370551e-24, -3.5264511998192251e-26], [-2.0632221412592244e-20, 2.3474228805070852e-21, 1.1424204120683528e-20, 5.6453913890378068e-21, 1.1409338154115824e-21, 1.0298865448313983e-22, 4.0679032761955362e-24, 7.9210257680975279e-26, 1.4061965751931537e-27], [7.0501599681711105e-22, -1.0156641840174221e-22, -3.9090089520589106e-22, -1.7838789876073631e-22, -3.2188607096984738e-23, -2.4401833986695444e-24, -7.5357153071069091e-26, -1.5051832416119013e-27, -4.7812633795824336e-29]],
        [[7.7662772329591974e-2, 4.5764253995687412e-2, 1.5646722009499358e-2, 3.0011658731315113e-3, 3.0464759216400511e-4, 1.4854316702065398e-5, 2.9435165476514412e-7, 1.7165866868646687e-9, 1.3124013403946567e-12], [-1.2411640778321562e-3, -7.3976455008086225e-4, -2.5899013108988607e-4, -5.1602315354152741e-5, -5.5407408640953233e-6, -2.9303288322921906e-7, -6.5488293600435189e-9, -4.6282529958623205e-11, -5.1600786801861642e-14], [1.3664502378506081e-5, 9.1107525127267148e-6, 3.8832650791992606e-6, 9.9019052095160998e-7, 1.3941299572663785e-7, 9.7785966468847990e-9, 2.9260572003314678e-10, 2.8245640031751567e-12, 4.5870036930860564e-15], [-9.6964272366727838e-8, -1.3243345182927367e-7, -1.0022372497933384e-7, -3.6942533215661714e-8, -6.6026283828296928e-9, -5.4565331659469919e-10, -1.8498621500639808e-11, -2.0014937837085339e-13, -3.7947198091718678e-16], [-1.5556875052934709e-9, 2.1788899505898649e-9, 3.0321961787384259e-9, 1.3354854358143526e-9, 2.6103376274943949e-10, 2.3053696208927492e-11, 8.3740337177789114e-13, 9.9739194482564898e-15, 2.2842382496216430e-17], [3.2711009237832025e-11, -3.0453748651387720e-11, -4.9497696113163481e-11, -2.3720075838185600e-11, -5.1108662745110299e-12, -5.1101994367234874e-13, -2.1843504207180113e-14, -3.2570208556340229e-16, -1.0668956775742595e-18], [2.8047452454608117e-12, -3.6203206368945835e-14, -1.0952761998118983e-12, -4.7148312624243630e-13, -6.7126777925887094e-14, -1.9421744478036884e-15, 1.6995219959511493e-16, 7.2074950646282758e-18, 4.5306744165755484e-20], [-1.3300000239722356e-13, 1.3564878392076862e-14, 6.7003904440059165e-14, 3.0104873677152750e-14, 5.0543570084944013e-15, 2.9929984512098734e-16, 1.2139339720294145e-18, -2.1977451037147111e-19, -2.1109955731830736e-21], [-1.0171505996936826e-15, 1.5302719545669264e-16, 6.5851666443275643e-16, 3.6253519981296021e-16, 8.8485409242584101e-17, 1.0655274673707223e-17, 6.1175598071336052e-19, 1.4505196196567503e-20, 1.0490321636405158e-22], [2.3742742101208652e-16, -3.0743892945774353e-17, -1.3285496726443584e-16, -6.3990407363871516e-17, -1.2596544276542828e-17, -1.1095000911261354e-18, -4.2670073390121876e-20, -6.9123192235188408e-22, -4.6017073920498800e-24], [-4.2300954709622414e-18, 6.1341209126969769e-19, 2.3642379567537892e-18, 1.0917633404364601e-18, 2.0319304436492281e-19, 1.6778716056408154e-20, 6.4267045402472780e-22, 1.3671952740507435e-23, 1.6123940696059096e-25], [-2.7644234455742143e-19, 3.1534738528234821e-20, 1.5270532514242287e-19, 7.5027515856351912e-20, 1.4929170652691750e-20, 1.2811103454003517e-21, 4.1108342163392569e-23, 2.1490675836650348e-25, -4.9122170597005740e-27], [1.3529706533193302e-20, -1.7379039009502545e-21, -7.4891906368783689e-21, -3.5549028440995961e-21, -6.7689402939718790e-22, -5.4879225936200549e-23, -1.6541151863261600e-24, -8.8716818718798495e-27, 1.8064613167453003e-28], [1.0961648739068682e-22, -5.0467417685843736e-24, -6.0475850054213162e-23, -3.4977567174625714e-23, -8.3837643469072600e-24, -9.1073703481847385e-25, -4.2397991233577223e-26, -7.9129285582234701e-28, -8.4899389696181635e-30]],
        [[7.4630980661013970e-2, 4.3966132254458035e-2, 1.5023580421006050e-2, 2.8789922138476187e-3, 2.9183095824908991e-4, 1.4198218253603839e-5, 2.8034825878615319e-7, 1.6241672765546898e-9, 1.2209351779985882e-12], [-1.7730893289894758e-3, -1.0480846973318861e-3, -3.6068706396542940e-4, -6.9923563512917313e-5, -7.2131516132231587e-6, -3.6027957422834753e-7, -7.4105787135984334e-9, -4.6048119322934105e-11, -4.0344098761664587e-14], [3.0633078092324785e-5, 1.8852939943781632e-5, 7.0249778918609525e-6, 1.5308553664489334e-6, 1.8409185887971870e-7, 1.1130693914680761e-8, 2.8972497672785740e-10, 2.4290740822908057e-12, 3.2706467316640111e-15], [-4.7304100492172512e-7, -3.9032775146057160e-7, -2.1427740034546249e-7, -6.6823349920192109e-8, -1.0839562849412175e-8, -8.3676174886782636e-10, -2.6661293919023512e-11, -2.6670727185907348e-13, -4.3112618726275842e-16], [-1.2738846686319058e-9, 9.4287704062406752e-9, 1.0630674248885455e-8, 4.4154084880031486e-9, 8.2766770985635703e-10, 6.9741004065704221e-11, 2.3712453744991014e-12, 2.5283073796996524e-14, 4.5150510403105347e-17], [5.5245114741563259e-10, -2.5945282891535837e-10, -5.1846510556172863e-10, -2.3966653089657143e-10, -4.7303609445460891e-11, -4.1540071454162626e-12, -1.4806691790616544e-13, -1.6937654795805686e-15, -3.4925637430025261e-18], [-1.4542624455983948e-11, 5.4784896454371167e-12, 1.2669735509243342e-11, 6.2248827656212299e-12, 1.3211063861139385e-12, 1.2766465464948396e-13, 5.1834528263928895e-15, 7.1507006473596302e-17, 2.0148281104261041e-19], [-1.2117599311622984e-12, 9.0760169648756155e-14, 5.7055358572251952e-13, 2.5577027291290266e-13, 4.2501705226337786e-14, 2.5257834032307933e-15, 1.9935130133541500e-17, -1.1962911152634421e-18, -9.3343530679609761e-21], [1.2385494059166407e-13, -1.4676461624615821e-14, -6.6423677561302755e-14, -3.1035989728201665e-14, -5.7033555653096585e-15, -4.2927570704166175e-16, -1.0888261493949935e-17, -2.8083880547447333e-20, 4.7714296524016056e-22], [-2.8573984790124479e-15, 3.5456987575934473e-16, 1.5367461675940783e-15, 7.0655884779347455e-16, 1.2538615515163312e-16, 8.5616048894637129e-18, 1.3755914348011864e-19, -2.7491883102668350e-21, -3.7089552341591417e-23], [-2.7612487691864386e-16, 3.3713177417842800e-17, 1.5384468922683084e-16, 7.5058562308554098e-17, 1.4968811570102362e-17, 1.3281052608715811e-18, 4.9800720495417194e-20, 6.9850520887548217e-22, 3.0690963791613610e-24], [2.5596413179484780e-17, -3.1812735400304513e-18, -1.4194042665604318e-17, -6.8349783756961738e-18, -1.3330774229714038e-18, -1.1360237000487282e-19, -3.9489647377926823e-21, -4.8409640836302802e-23, -1.9032893015561357e-25], [-4.5861375462273234e-19, 6.4185178785796720e-20, 2.5456453033777674e-19, 1.1778080926287739e-19, 2.1769600646326283e-20, 1.7295894439537600e-21, 5.7096368989912941e-23, 8.4627398262092814e-25, 7.3641673895928120e-27], [-6.3937126280285038e-20, 7.1871773640902226e-21, 3.5372921448123827e-20, 1.7498745508480113e-20, 3.5232185713932184e-21, 3.1037341126759359e-22, 1.0837631535519511e-23, 1.0789192709253670e-25, -1.0561458651679010e-28]],
        [[7.1312103783564993e-2, 4.2007534214493784e-2, 1.4351860509057203e-2, 2.7494967764772631e-3, 2.7858452759465165e-4, 1.3544833334330635e-5, 2.6716547602895420e-7, 1.5448684856301379e-9, 1.1560584141054408e-12], [-1.5503907030557872e-3, -9.1377914738571924e-4, -3.1254933639471076e-4, -5.9989520565446015e-5, -6.0955406749182208e-6, -2.9763644860549299e-7, -5.9101663402424651e-9, -3.4573364070994612e-11, -2.6545420903757422e-14], [2.5121884473347693e-5, 1.4926562286128297e-5, 5.1918489474168201e-6, 1.0236431023306405e-6, 1.0820771170283589e-7, 5.5928911716886504e-9, 1.2070495660031748e-10, 8.0435006181016853e-13, 7.8692906362250686e-16], [-4.2907722181360439e-7, -2.7372880247920129e-7, -1.0863808944726419e-7, -2.5582713646578175e-8, -3.3341174395002555e-9, -2.1732926528678218e-10, -6.0345042303265728e-12, -5.3119369221322263e-14, -7.2627251370786907e-17], [5.3146255859499775e-9, 5.5522854407820707e-9, 3.6463481129264071e-9, 1.2526759443025998e-9, 2.1364972248697902e-10, 1.6901947276972577e-11, 5.4250220994619858e-13, 5.3696588443562242e-15, 8.2434873521473494e-18], [1.1649237073283127e-10, -1.3481441680538136e-10, -1.9348161668595442e-10, -8.4021402311850144e-11, -1.5925945648484978e-11, -1.3384021256696195e-12, -4.4871827838440068e-14, -4.6329014887365765e-16, -7.5881357060857429e-19], [-1.3837890675841909e-11, 4.0123664846950583e-12, 1.0231890753475170e-11, 4.8089198464867853e-12, 9.4350701283656518e-13, 8.1345480605382206e-14, 2.8042721797083159e-15, 3.0159838022040619e-17, 5.3737592116399580e-20], [5.6831535502708870e-13, -1.1036048457819960e-13, -3.6635586196574939e-13, -1.7833808278635449e-13, -3.6008814393700433e-14, -3.2167230187766431e-15, -1.1665898821121252e-16, -1.3609558739906680e-18, -2.8495557285323229e-21], [3.4932285525948890e-17, 5.2379522677450302e-16, 1.0171621111790930e-15, 7.3427329442810610e-16, 2.2806421534942745e-16, 3.0894494086095280e-17, 1.6867703406236811e-18, 3.0156182720895241e-20, 1.0497117560951502e-22], [-1.6388744844594725e-15, 1.9949439288768204e-16, 8.8706259175833276e-16, 4.1609676211319640e-16, 7.7272172302649764e-17, 5.9741512593133815e-18, 1.6550208325634934e-19, 9.5717041485544945e-22, -2.1287511366193549e-24], [1.1134868190960142e-16, -1.3715545767338747e-17, -6.1264034765277858e-17, -2.9227864791385855e-17, -5.5830101589673348e-18, -4.5315642900498103e-19, -1.3844049483363919e-20, -1.0978352074858631e-22, 1.4783533437741663e-26], [-2.7907452953418585e-18, 3.3943185825570567e-19, 1.5377091665551946e-18, 7.3741081983311667e-19, 1.4164820790958543e-19, 1.1540999815071942e-20, 3.4929905450556717e-22, 2.4790086899092262e-24, -4.6576742308544667e-27], [-1.2842903100420810e-19, 1.5652554014291521e-20, 7.1266657458689887e-20, 3.4565359881195497e-20, 6.8078134494331430e-21, 5.8783527973994208e-22, 2.0709876025151343e-23, 2.5021200507915954e-25, 7.9715691910820059e-28], [1.6128836972617182e-20, -1.9410059292136896e-21, -8.9332624490333217e-21, -4.3361879891799352e-21, -8.5268315476007154e-22, -7.3035980619380102e-23, -2.5034775488132509e-24, -2.7620043398687093e-26, -6.5514972389218323e-29]],
        [[6.8397071227410590e-2, 4.0289936107591725e-2, 1.3764719331173883e-2, 2.6369119403545826e-3, 2.6716155158190822e-4, 1.2988298721740495e-5, 2.5615262560346856e-7, 1.4808316258123794e-9, 1.1075449081224953e-12], [-1.3684806983750823e-3, -8.0617121370529415e-4, -2.7546093617166418e-4, -5.2782412802992998e-5, -5.3495841732414922e-6, -2.6021119044538452e-7, -5.1359889001325462e-9, -2.9732134498197330e-11, -2.2302056116165187e-14], [2.0515369600649480e-5, 1.2100140728710572e-5, 4.1449372596430548e-6, 7.9749566295214211e-7, 8.1328377682216097e-8, 3.9924436546551171e-9, 7.9921696090203498e-11, 4.7374262559687918e-13, 3.7331173718971277e-16], [-3.3848556976605276e-7, -2.0219272833280099e-7, -7.1091766524516967e-8, -1.4250480840042981e-8, -1.5410271717657368e-9, -8.2043244394375865e-11, -1.8382064290974930e-12, -1.2832326003802363e-14, -1.3260268523447320e-17], [5.4721092178032210e-9, 3.5954435620104966e-9, 1.4959478020594020e-9, 3.7067593495918000e-10, 5.0556694748023342e-11, 3.4163612240594543e-12, 9.7267780706317268e-14, 8.6624980868279967e-16, 1.1675752624303913e-18], [-5.4975756304396983e-11, -7.0042858693654504e-11, -5.1063994689218126e-11, -1.8336944208737051e-11, -3.1869019509219745e-12, -2.5364691898757568e-13, -8.1157151036417315e-15, -7.9165349574396345e-17, -1.1639109852918698e-19], [-2.2030578649530316e-12, 1.6710466775394269e-12, 2.7149566852377442e-12, 1.1988480271246618e-12, 2.2759314846908530e-13, 1.9023379500917465e-14, 6.2989861261911977e-16, 6.3439755917714514e-18, 9.7684271712899820e-21], [2.1923478652648364e-13, -5.2137420882202197e-14, -1.4916975332192966e-13, -7.0407253360957196e-14, -1.3734572909128970e-14, -1.1695857339105859e-15, -3.9466525501210152e-17, -4.0812304008597925e-19, -6.6236655918061837e-22], [-1.0854130594133311e-14, 1.7464475025742015e-15, 6.5298712964217735e-15, 3.1600651249552568e-15, 6.2627945611854356e-16, 5.4272272740067473e-17, 1.8764627654913275e-18, 2.0190077638498121e-20, 3.5602041753359622e-23], [2.9382385742612022e-16, -4.0637656927192381e-17, -1.7239142929026302e-16, -8.5578567657849426e-17, -1.7477442449383915e-17, -1.5785188146126006e-18, -5.7956246440942052e-20, -6.8513964051994203e-22, -1.4398531130898022e-24], [3.8168472237287042e-18, -5.0713385982161466e-19, -1.9369347411096747e-18, -7.9920635138341348e-19, -1.1519316857258067e-19, -4.2956823495742033e-21, 1.6081058623083184e-22, 7.5295992050288853e-24, 3.6281303749317903e-26], [-9.3966893160271444e-19, 1.1853363448488656e-19, 5.1726717489662834e-19, 2.4501618334769449e-19, 4.6353774047041951e-20, 3.7106320637283854e-21, 1.1111372673792865e-22, 8.6100384757519502e-25, 8.7484293543823996e-29], [5.6228767268522301e-20, -6.9014610654797359e-21, -3.1084460849312419e-20, -1.4940270399393989e-20, -2.8889098466052667e-21, -2.3959642448414027e-22, -7.6512701779668061e-24, -6.9167774092068986e-26, -5.7893885596058093e-29], [-1.7418465168632447e-21, 2.0712991086977167e-22, 9.6349051875242075e-22, 4.6811071169018088e-22, 9.1868671456734634e-23, 7.7878655474014733e-24, 2.5726802718112045e-25, 2.4631970286846298e-27, 2.3088450383096612e-30]],
        [[6.5812359004623424e-2, 3.8767339278236679e-2, 1.3244502592533613e-2, 2.5372431498878491e-3, 2.5706186718690665e-4, 1.2497175057627102e-5, 2.4646318460252949e-7, 1.4247813895598781e-9, 1.0655685099500762e-12], [-1.2192109335404335e-3, -7.1819174935385974e-4, -2.4536714021564667e-4, -4.7005980161904413e-5, -4.7625999263206454e-6, -2.3154803454464038e-7, -4.5668422557340795e-9, -2.6403991468851692e-11, -1.9752368070940196e-14], [1.6937551079763924e-5, 9.9787002617183131e-6, 3.4101961053907487e-6, 6.5362139649122947e-7, 6.6272469698217753e-8, 3.2255104187031325e-9, 6.3721901253384704e-11, 3.6942972238448162e-13, 2.7791981958568417e-16], [-2.6109531972227366e-7, -1.5409344904342729e-7, -5.2854419686513995e-8, -1.0190726584907726e-8, -1.0424718970369218e-9, -5.1403812067881847e-11, -1.0357119668970132e-12, -6.2007224956262438e-15, -4.9713621632763742e-18], [4.1791708931763850e-9, 2.5043400740586178e-9, 8.8609802758788351e-10, 1.7928288823413211e-10, 1.9624618329222169e-11, 1.0602663870915035e-12, 2.4153362723850658e-14, 1.7148849714276491e-16, 1.7912359135536548e-19], [-6.3913756435803407e-11, -4.2465882777511561e-11, -1.7965619909736769e-11, -4.5243238969004354e-12, -6.2481305199532723e-13, -4.2540300499425140e-14, -1.2133172313037219e-15, -1.0737398898926680e-17, -1.4116987663120432e-20], [5.8507626375682172e-13, 7.8256370809363518e-13, 5.8215474428011473e-13, 2.1035522979010930e-13, 3.6566982813934516e-14, 2.8995267688240429e-15, 9.2024262366465422e-17, 8.8368474545168685e-19, 1.2523623271201366e-21], [2.5044912731564032e-14, -1.7738362002545120e-14, -2.9459041814598899e-14, -1.3013377882170407e-14, -2.4617195796237928e-15, -2.0438263729180759e-16, -6.6914773261575191e-18, -6.6037349615767165e-20, -9.7034869436212261e-23], [-2.4183511326572927e-15, 5.4693793239002065e-16, 1.6100155846010565e-15, 7.5857519348830897e-16, 1.4714240972648387e-16, 1.2412032458577311e-17, 4.1241952800439902e-19, 4.1490022974307468e-21, 6.3197719740856526e-24], [1.2948683776324340e-16, -1.9876417803889316e-17, -7.6439266940022585e-17, -3.6808290100148141e-17, -7.2229431402911576e-18, -6.1621815785863915e-19, -2.0781968320969427e-20, -2.1407536372433280e-22, -3.4241358137173091e-25], [-4.9139642489613601e-18, 6.4843558806155210e-19, 2.8038597591817169e-18, 1.3678990149068009e-18, 2.7172573178225878e-19, 2.3558579620185376e-20, 8.1363738410222713e-22, 8.7157325426811377e-24, 1.5097158190065300e-26], [1.0796214782054513e-19, -1.2866513054340096e-20, -6.1201529950772046e-20, -3.0607215417525974e-20, -6.2751433166838056e-21, -5.6847642283566010e-22, -2.0912601741996604e-23, -2.4675804846946649e-25, -5.0803512571359475e-28], [1.5736168424469623e-21, -2.4043208409273978e-22, -8.4860343039255524e-22, -3.6133187339770901e-22, -5.6742885039951465e-23, -2.9897238254735146e-24, -3.8722047560422485e-28, 1.8667056648176006e-27, 1.0167091397600004e-29], [-3.0041570731545812e-22, 3.8405078859341821e-23, 1.6603586457890122e-22, 7.8692698867625679e-23, 1.4915546615089144e-23, 1.1988896754539311e-24, 3.6271680587928514e-26, 2.9219703710893674e-28, 1.2558437977720081e-31]],
        [[6.3500257838068389e-2, 3.7405371849225076e-2, 1.2779195998578528e-2, 2.4481036427036185e-3, 2.4803051723272313e-4, 1.2058101771837614e-5, 2.3780368840317241e-7, 1.3747186991134637e-9, 1.0281231114230030e-12], [-1.0951978571802792e-3, -6.4513608910773481e-4, -2.2040500029447214e-4, -4.2222952958892353e-5, -4.2778470432914719e-6, -2.0797016114112526e-7, -4.1015083574998549e-9, -2.3710657939235965e-11, -1.7733079992602518e-14], [1.4166265684502389e-5, 8.3448824730066911e-6, 2.8510383296689310e-6, 5.4619889256416080e-7, 5.5342433341636121e-8, 2.6907868046980060e-9, 5.3075018383223165e-11, 3.0690325761307204e-13, 2.2964766204827055e-16], [-2.0356705249592754e-7, -1.1993830838862245e-7, -4.0993940792563438e-8, -7.8588187958102895e-9, -7.9707362559318407e-10, -3.8811308509231369e-11, -7.6724757698421543e-13, -4.4527560485405223e-15, -3.3561225098749306e-18], [3.0670101094570823e-9, 1.8105832699854324e-9, 6.2138211656413307e-10, 1.1991266221224302e-10, 1.2282039905805037e-11, 6.0666638664520400e-13, 1.2251845045110898e-14, 7.3576911681799805e-17, 5.9202103981916406e-20], [-4.7018870819674621e-11, -2.8177120169982774e-11, -9.9701534166915717e-12, -2.0170373370987849e-12, -2.2068105277305698e-13, -1.1907243982596142e-14, -2.7044097653701011e-16, -1.9071842328696450e-18, -1.9570714747701417e-21], [6.8703710098082114e-13, 4.5247353329673317e-13, 1.8880693401384092e-13, 4.6850375997955184e-14, 6.3800350154691835e-15, 4.2862861936017866e-16, 1.2055639083357185e-17, 1.0483243200338795e-19, 1.3370363103374490e-22], [-6.5259123598759096e-15, -7.8008214405005547e-15, -5.5033608464184004e-15, -1.9420250447513349e-15, -3.3298166271451791e-16, -2.6117915436701105e-17, -8.1935798613523130e-19, -7.7407563612410408e-21, -1.0624724941286331e-23], [-1.9282669370221382e-16, 1.6285096001078754e-16, 2.5422838808267763e-16, 1.1097991678718206e-16, 2.0839130409441072e-17, 1.7167397304114228e-18, 5.5613059228943457e-20, 5.3941178395485519e-22, 7.6377702734666874e-25], [1.9829796910086919e-17, -4.6897922327148304e-18, -1.3384228025463239e-17, -6.2706885162910686e-18, -1.2092547135839563e-18, -1.0118878673349075e-19, -3.3212428613709301e-21, -3.2715293416873291e-23, -4.7572757352728483e-26], [-1.0995484768382724e-18, 1.7031036953247112e-19, 6.4830089892562675e-19, 3.1062864153294126e-19, 6.0526337592786431e-20, 5.1097182350335561e-21, 1.6951255895169655e-22, 1.6970346390781778e-24, 2.5486741145381765e-27], [4.6821509340496020e-20, -6.2044042066411008e-21, -2.6575986847107109e-20, -1.2864518894046361e-20, -2.5261608051699446e-21, -2.1528059723149085e-22, -7.2392347051254975e-24, -7.4096287681025952e-26, -1.1642930163777316e-28], [-1.5252230849126154e-21, 1.8771955260611336e-22, 8.5515925813540335e-22, 4.1793374919472026e-22, 8.2967067554842810e-23, 7.1783838725337933e-24, 2.4689873416028945e-25, 2.6219574441527900e-27, 4.4327558979329132e-30], [3.0926456864442403e-23, -3.4969263211817977e-24, -1.7289617776958866e-23, -8.6404392699484479e-24, -1.7654228854292913e-24, -1.5898727872236616e-25, -5.7910428430603682e-27, -6.7097882357101403e-29, -1.3223124438606577e-31]],
        [[6.1416001914828084e-2, 3.6177622685433229e-2, 1.2359746729949354e-2, 2.3677499022312567e-3, 2.3988943775734186e-4, 1.1662319199800686e-5, 2.2999824504099240e-7, 1.3295960196741947e-9, 9.9437650179070742e-13], [-9.9087070891850805e-4, -5.8368091678627814e-4, -1.9940915034733805e-4, -3.8200707526965548e-5, -3.8703193971433413e-6, -1.8815716049755008e-7, -3.7107403487210894e-9, -2.1451422557161297e-11, -1.6043085672328801e-14], [1.1989577333755972e-5, 7.0625721079715696e-6, 2.4128679963394692e-6, 4.6223372447230730e-7, 4.6831667061368870e-8, 2.2767604534132672e-9, 4.4901700680107805e-11, 2.5957767977483024e-13, 1.9414061914545234e-16], [-1.6119056503114168e-7, -9.4952583093476759e-8, -3.2441016028999617e-8, -6.2151263173377051e-9, -6.2975093972903174e-10, -3.0620080155391276e-11, -6.0400600627398340e-13, -3.4929301380985016e-15, -2.6140699098833318e-18], [2.2750722527017682e-9, 1.3404597084811828e-9, 4.5817589448603450e-10, 8.7840760622238594e-11, 8.9099360529332173e-12, 4.3389557251774851e-13, 8.5788656677045774e-15, 4.9797726307469403e-17, 3.7540819104906847e-20], [-3.2984478480099728e-11, -1.9469637499655636e-11, -6.6800688517097385e-12, -1.2885209371153678e-12, -1.3188352910336460e-13, -6.5071406540227044e-15, -1.3117586366075748e-16, -7.8515093494723619e-19, -6.2687691241633947e-22], [4.8271980798909195e-13, 2.8857266237789848e-13, 1.0160528242291389e-13, 2.0401655239968629e-14, 2.2092836103487517e-15, 1.1761337568739296e-16, 2.6249515626911632e-18, 1.8077918316958154e-20, 1.7873502829041053e-23], [-6.7932976549534117e-15, -4.3780321475697107e-15, -1.7649099115231889e-15, -4.2186001759252691e-16, -5.5489325494984176e-17, -3.6157338540598182e-18, -9.8932357504414658e-20, -8.3681603590095319e-22, -1.0294136867067746e-24], [7.0541540754337695e-17, 7.0238258307633704e-17, 4.4534248159265041e-17, 1.4933570798395269e-17, 2.4902771947620329e-18, 1.9174731374719396e-19, 5.9218487468294128e-21, 5.4963777048309345e-23, 7.3271247382423737e-26], [9.6090068331468122e-19, -1.3230390702829995e-18, -1.8061910294763618e-18, -7.6905659213285283e-19, -1.4270991921731638e-19, -1.1647192247434652e-20, -3.7335462701939215e-22, -3.5659484905263590e-24, -4.8979679037293133e-27], [-1.2582990978479327e-19, 3.3987642134444972e-20, 8.9221877493655091e-20, 4.1399560856046675e-20, 7.9319771575748133e-21, 6.5886146367831462e-22, 2.1401864693500569e-23, 2.0725278918249849e-25, 2.9079364621913756e-28], [7.1577370634716761e-21, -1.1622884761489507e-21, -4.2651804422049874e-21, -2.0323597342398568e-21, -3.9367942114392835e-22, -3.2964882821477932e-23, -1.0801282873818295e-24, -1.0588757821385666e-26, -1.5204791114418691e-29], [-3.1893130401350042e-22, 4.3171433514321586e-23, 1.8128702796427105e-22, 8.7265297922205113e-23, 1.7009559317026238e-23, 1.4339648472464551e-24, 4.7421564404000043e-26, 4.7177347695610097e-28, 6.9763621148562486e-31], [1.1742592512281039e-23, -1.4770526360948189e-24, -6.5750760404997155e-24, -3.1856685209600745e-24, -6.2488600976180263e-25, -5.3126251169585582e-26, -1.7789072191299552e-27, -1.8061405140965405e-29, -2.7821749829893349e-32]],
        [[5.9524458029133937e-2, 3.5063392513963213e-2, 1.1979080388045346e-2, 2.2948258550461765e-3, 2.3250111081177450e-4, 1.1303132733106500e-5, 2.2291455326841721e-7, 1.2886459177713308e-9, 9.6375077451535145e-13], [-9.0211876631986531e-4, -5.3140079801752274e-4, -1.8154811794954002e-4, -3.4779073680048225e-5, -3.5236544737878559e-6, -1.7130384878263493e-7, -3.3783662551875415e-9, -1.9529986035913979e-11, -1.4606061090734644e-14], [1.0253801467891333e-5, 6.0400902568942525e-6, 2.0635407907766714e-6, 3.9531149950758942e-7, 4.0051145847385550e-8, 1.9471034684428187e-9, 3.8399808020535436e-11, 2.2198565290384571e-13, 1.6601881090345025e-16], [-1.2949737954324696e-7, -7.6281667908697756e-8, -2.6061008558701401e-8, -4.9925207266367748e-9, -5.0582318899953074e-10, -2.4591085586238356e-11, -4.8498125808461293e-13, -2.8037046944636561e-15, -2.0969407921878950e-18], [1.7171931980249054e-9, 1.0115486600822707e-9, 3.4560129886313090e-10, 6.6211328670248053e-11, 6.7089281204104904e-12, 3.2620694163384091e-13, 6.4347437465571921e-15, 3.7212013180944844e-17, 2.7849074555822328e-20], [-2.3418100069078273e-11, -1.3797497489478921e-11, -4.7158272456924708e-12, -9.0403925475613312e-13, -9.1688088821386420e-14, -4.4641921342282401e-15, -8.8238748958384828e-17, -5.1193405531682816e-19, -3.8548715544320399e-22], [3.2493749960263515e-13, 1.9172558928968570e-13, 6.5728247448872578e-14, 1.2661759830789307e-14, 1.2934303743620347e-15, 6.3634435787146445e-17, 1.2772273391211388e-18, 7.5908294161418130e-21, 5.9765110752917907e-24], [-4.5371129463905522e-15, -2.7025641698681460e-15, -9.4466765048460246e-16, -1.8758793099567290e-16, -2.0006380547618526e-17, -1.0440054041583990e-18, -2.2706766780024951e-20, -1.5111697158322557e-22, -1.4203979768605462e-25], [6.1666979092681879e-17, 3.8750293560597377e-17, 1.4970252118820967e-17, 3.4051097115245168e-18, 4.2641608512042311e-19, 2.6557300121839725e-20, 6.9741735474172782e-22, 5.6721110319546643e-24, 6.6725003729808272e-27], [-6.9152909129998993e-19, -5.7865966437321473e-19, -3.2013731790542529e-19, -9.9381271280016992e-20, -1.5850301786691976e-20, -1.1858049114797410e-21, -3.5828625117696747e-23, -3.2564319804762486e-25, -4.2180532840652554e-28], [-1.5033130287408735e-21, 9.7653793256425676e-21, 1.0956903402006626e-20, 4.4716561374281183e-21, 8.1454116414583381e-22, 6.5669778794733430e-23, 2.0811111343439747e-24, 1.9589413253845229e-26, 2.6216237862158120e-29], [6.2712663810608142e-22, -2.1665030759646210e-22, -4.9383816625992337e-22, -2.2558737877253010e-22, -4.2876241516188425e-23, -3.5351905392049132e-24, -1.1376703081496104e-25, -1.0859610242207232e-27, -1.4806794500995915e-30], [-3.7300382347403557e-23, 6.6353575649990749e-24, 2.2788158023376192e-23, 1.0783881717277008e-23, 2.0773477582851925e-24, 1.7274998041237792e-25, 5.6038107487250103e-27, 5.4035964147179302e-29, 7.4997546907160225e-32], [1.6933206845454036e-24, -2.3785843891278604e-25, -9.6890912011356905e-25, -4.6407208468209906e-25, -8.9938876902307153e-26, -7.5213109424547512e-27, -2.4571185592043685e-28, -2.3949338744840651e-30, -3.3935937947228346e-33]],
        [[5.7797637856207149e-2, 3.4046194279661723e-2, 1.1631564115962413e-2, 2.2282523532463038e-3, 2.2575619237414045e-4, 1.0975225873510287e-5, 2.1644774323723483e-7, 1.2512619587246655e-9, 9.3579210841222990e-13], [-8.2587019404957747e-4, -4.8648592096291321e-4, -1.6620336878299245e-4, -3.1839488151388323e-5, -3.2258292507598864e-6, -1.5682495498166117e-7, -3.0928208721658692e-9, -1.7879276803097751e-11, -1.3371529531192457e-14], [8.8504910519567772e-6, 5.2134576929311512e-6, 1.7811291245508701e-6, 3.4120993588102762e-7, 3.4569809019516134e-8, 1.6806249044669053e-9, 3.3144419590847623e-11, 1.9160447208290845e-13, 1.4329692091829777e-16], [-1.0538493847555178e-7, -6.2077909389702433e-8, -2.1208342992080378e-8, -4.0628722754894238e-9, -4.1163161940261629e-10, -2.0011649996333361e-11, -3.9465993947953844e-13, -2.2814927111327664e-15, -1.7062858960232570e-18], [1.3175823395929809e-9, 7.7613449389052949e-10, 2.6516003280273631e-10, 5.0796850020816151e-11, 5.1465443467119458e-12, 2.5020430461452602e-13, 4.9344882518031878e-15, 2.8526563339831107e-17, 2.1335509368896765e-20], [-1.6943599748281808e-11, -9.9809561372093829e-12, -3.4100308290588650e-12, -6.5329792120494584e-13, -6.6195140163564504e-14, -3.2185271141799896e-15, -6.3486489721967893e-17, -3.6712142542798462e-19, -2.7471886033787736e-22], [2.2189988413896857e-13, 1.3073318706371539e-13, 4.4678828343533660e-14, 8.5637421679046544e-15, 8.6833589474247565e-16, 4.2263712818793821e-17, 8.3494110103192080e-19, 4.8398757227746574e-21, 3.6381055846045879e-24], [-2.9416722574460920e-15, -1.7348905753032133e-15, -5.9418553789325550e-16, -1.1428361204736868e-16, -1.1647242089228884e-17, -5.7108656503330369e-19, -1.1404895921195796e-20, -6.7239882665362329e-23, -5.2140619628120237e-26], [3.9198856803425811e-17, 2.3266196752046862e-17, 8.0739292732534860e-18, 1.5854329119039482e-18, 1.6646199390624267e-19, 8.5064785751944854e-21, 1.7993963348929162e-22, 1.1529995554958280e-24, 1.0235889396717723e-27], [-5.1404025735186993e-19, -3.1586926892212654e-19, -1.1723337128063716e-19, -2.5342676046582033e-20, -3.0030457573847429e-21, -1.7697664096441372e-22, -4.4058222709521596e-24, -3.4003191671359557e-26, -3.7771782434870914e-29], [6.0223233038209990e-21, 4.4085108290043394e-21, 2.1205855286669844e-21, 5.9667685980077696e-22, 8.9264298031667327e-23, 6.3960736978327615e-24, 1.8719321900072246e-25, 1.6552575342331465e-27, 2.0772633320767235e-30], [-2.7746474457289287e-23, -6.6982869208483313e-23, -5.9054176999691364e-23, -2.2540547763430474e-23, -3.9864122213449612e-24, -3.1575893257790594e-25, -9.8667005270430666e-27, -9.1475965345075404e-29, -1.1956425299036833e-31], [-2.3901220151651891e-24, 1.2648336698027149e-24, 2.3431111384609148e-24, 1.0431010233851432e-24, 1.9604261043212974e-25, 1.6028427251320550e-26, 5.1114170933176864e-28, 4.8170863492091402e-30, 6.4133781350945662e-33], [1.5898798474077049e-25, -3.3131848109641159e-26, -1.0207265298350554e-25, -4.7830454761417447e-26, -9.1589742890761652e-27, -7.5681147406401828e-28, -2.4339226949578813e-29, -2.3151962588769280e-31, -3.1277434628518335e-34]],
        [[5.6212933872225295e-2, 3.3112710806634038e-2, 1.1312648210696541e-2, 2.1671578083076347e-3, 2.1956637647397414e-4, 1.0674305544617244e-5, 2.1051314773200488e-7, 1.2169546774626212e-9, 9.1013442504894221e-13], [-7.5979036401085049e-4, -4.4756103025383978e-4, -1.5290504355757907e-4, -2.9291935267163397e-5, -2.9677230067059454e-6, -1.4427701844245043e-7, -2.8453569343922061e-9, -1.6448713385722281e-11, -1.2301641615787790e-14], [7.7020433980380408e-6, 4.5369547218080594e-6, 1.5500081843710281e-6, 2.9693421747636650e-7, 3.0083997600861242e-8, 1.4625453515390156e-9, 2.8843565099431232e-11, 1.6674165986161976e-13, 1.2470252934253016e-16], [-8.6750897452369396e-8, -5.1101360577641838e-8, -1.7458302597117230e-8, -3.3444775363430748e-9, -3.3884696364259054e-10, -1.6473179033645783e-11, -3.2487556643652794e-13, -1.8780722023279211e-15, -1.4045704331370600e-18], [1.0259603828567982e-9, 6.0435083706605823e-10, 2.0647086868241827e-10, 3.9553527201604294e-11, 4.0073823202719305e-12, 1.9482063296343583e-13, 3.8421568956407538e-15, 2.2211154208095663e-17, 1.6611306994166447e-20], [-1.2480181449040162e-11, -7.3515685781507788e-12, -2.5116022748472405e-12, -4.8114859528272915e-13, -4.8748091124684208e-14, -2.3699318972416486e-15, -4.6739276428904566e-17, -2.7020122369248269e-19, -2.0208630815809953e-22], [1.5462367037733311e-13, 9.1083666804627145e-14, 3.1118784268941001e-14, 5.9616854087471563e-15, 6.0405172371685549e-16, 2.9369116648461817e-17, 5.7928665860045992e-19, 3.3495553853134087e-21, 2.5061001187728942e-24], [-1.9404576880715536e-15, -1.1431716278151970e-15, -3.9064516956567237e-16, -7.4863773280768803e-17, -7.5890561338531528e-18, -3.6924057699061561e-19, -7.2905544119067426e-21, -4.2223772228392014e-23, -3.1685579575487846e-26], [2.4574545045373765e-17, 1.4487129136954590e-17, 4.9574172930931950e-18, 9.5216228737088671e-19, 9.6839396656707580e-20, 4.7340002163220989e-21, 9.4121991168153972e-23, 5.5103910183983929e-25, 4.2174323647037503e-28], [-3.1268026933080098e-19, -1.8505961541626102e-19, -6.3844927442532100e-20, -1.2422285462264837e-20, -1.2873341606229008e-21, -6.4615273673101734e-23, -1.3336532523116774e-24, -8.2532472878928646e-27, -6.9346948703072280e-30], [3.9467173161228566e-21, 2.3848931449519834e-21, 8.5753788150975541e-22, 1.7748191444256112e-22, 1.9967962740338484e-23, 1.1113475123828012e-24, 2.6040596338878456e-26, 1.8851396765033814e-28, 1.9476078280087019e-31], [-4.6824955092424204e-23, -3.1289690572917378e-23, -1.3331652057041729e-23, -3.3706812690809935e-24, -4.6459934421185802e-25, -3.1323766698976096e-26, -8.7500406657285392e-28, -7.4422550854734175e-30, -8.9777261454559672e-33], [3.8488774310806611e-25, 4.3339092629958942e-25, 2.9545943518640730e-25, 1.0223111541784181e-25, 1.7249012007070727e-26, 1.3291758463471295e-27, 4.0722491573147410e-29, 3.7078009737769218e-31, 4.7332907574040871e-34], [5.8252588337932880e-27, -7.0017673965200929e-27, -9.8403143223353565e-27, -4.1943751939103546e-27, -7.7450243716676689e-28, -6.2620363726447737e-29, -1.9769663355971131e-30, -1.8403317472005310e-32, -2.3997279723490568e-35]],
        [[5.4751858209306168e-2, 3.2252051656498827e-2, 1.1018612054860589e-2, 2.1108294633271978e-3, 2.1385944984731214e-4, 1.0396861067398361e-5, 2.0504153086861185e-7, 1.1853238277631834e-9, 8.8647838777671727e-13], [-7.0207674423701808e-4, -4.1356432754137755e-4, -1.4129038776964888e-4, -2.7066922031993776e-5, -2.7422949865950442e-6, -1.3331774678148230e-7, -2.6292238315957758e-9, -1.5199270328014173e-11, -1.1367209820967879e-14], [6.7518941388392813e-6, 3.9772611500677518e-6, 1.3587941047047322e-6, 2.6030344082690073e-7, 2.6372737173589870e-8, 1.2821209658900744e-9, 2.5285328327366010e-11, 1.4617186109766920e-13, 1.0931881466156050e-16], [-7.2147728783685274e-8, -4.2499238434991801e-8, -1.4519467673445112e-8, -2.7814864572086891e-9, -2.8180730621721311e-10, -1.3700172813489867e-11, -2.7018774250846438e-13, -1.5619273337986559e-15, -1.1681321264680377e-18], [8.0948425332860596e-10, 4.7683364584339823e-10, 1.6290576187934484e-10, 3.1207768231185350e-11, 3.1618264412692582e-12, 1.5371344180447029e-13, 3.0314574578404763e-15, 1.7524543425666824e-17, 1.3106234870502254e-20], [-9.3417507048363971e-12, -5.5028389429534927e-12, -1.8799939060490309e-12, -3.6014952479246258e-13, -3.6488697715637274e-14, -1.7739136430865372e-15, -3.4984246672888271e-17, -2.0224062996564541e-19, -1.5125188687654411e-22], [1.0980360259086492e-13, 6.4680823459199274e-14, 2.2097648295738136e-14, 4.2332495092001784e-15, 4.2889546096359950e-16, 2.0851078603945770e-17, 4.1121873887216677e-19, 2.3772532360753046e-21, 1.7779510550073916e-24], [-1.3073926990650215e-15, -7.7013812713635286e-16, -2.6311563687469398e-16, -5.0406496970981852e-17, -5.1071878952775093e-18, -2.4830439752657729e-19, -4.8974049153304367e-21, -2.8315631548961762e-23, -2.1182379344182106e-26], [1.5715655490406153e-17, 9.2580971945786628e-18, 3.1634079295724870e-18, 6.0615536311805338e-19, 6.1434207108299437e-20, 2.9881433805891972e-21, 5.8973780744522828e-23, 3.4130929857335094e-25, 2.5578490248938002e-28], [-1.9025880808752387e-19, -1.1212590889345861e-19, -3.8343947437261553e-20, -7.3569624945629423e-21, -7.4708271228473621e-22, -3.6439630245192886e-23, -7.2211422870142944e-25, -4.2057994674202099e-27, -3.1882865991715160e-30], [2.3133315919008201e-21, 1.3664139913144396e-21, 4.6947148136537777e-22, 9.0751779425657245e-23, 9.3166294343290819e-24, 4.6151300665791540e-25, 9.3508422269921345e-27, 5.6315444111812629e-29, 4.5231316254626024e-32], [-2.8045248312699183e-23, -1.6759124035465465e-23, -5.8954771742512545e-24, -1.1817379586453699e-24, -1.2757730830701769e-25, -6.7551879307082003e-27, -1.4932705497433555e-28, -1.0100083938142927e-30, -9.5936606455303368e-34], [3.2936996648691193e-25, 2.0789552958022896e-25, 8.0901369529106105e-26, 1.8544554485887190e-26, 2.3364037235939065e-27, 1.4589800441682869e-28, 3.8216901747008918e-30, 3.0744786900972707e-32, 3.5129469513110575e-35], [-3.2843519448782879e-27, -2.6654130873220700e-27, -1.4329658343339679e-27, -4.3573163508190130e-28, -6.8416680317842327e-29, -5.0448015312916155e-30, -1.4988968939893613e-31, -1.3309568372738231e-33, -1.6534712546416034e-36]],
        [[5.3399124871348506e-2, 3.1455212482082025e-2, 1.0746379397337563e-2, 2.0586780025516599e-3, 2.0857570575335613e-4, 1.0139989775061917e-5, 1.9997564774527693e-7, 1.1560384827438752e-9, 8.6457650338841544e-13], [-6.5131782949981201e-4, -3.8366435348228412e-4, -1.3107534104573984e-4, -2.5110031137994464e-5, -2.5440318785187422e-6, -1.2367910798835636e-7, -2.4391355692847307e-9, -1.4100389795038954e-11, -1.0545380527889291e-14], [5.9580984249339562e-6, 3.5096689767332836e-6, 1.1990456082475576e-6, 2.2970050902694463e-7, 2.3272190076880374e-8, 1.1313866520189822e-9, 2.2312623938431911e-11, 1.2898696523854354e-13, 9.6466597831019469e-17], [-6.0558976149300454e-8, -3.5672784284715328e-8, -1.2187273391463341e-8, -2.3347092743330751e-9, -2.3654191383342806e-10, -1.1499577956376613e-11, -2.2678874459329413e-13, -1.3110422157475801e-15, -9.8050048718175742e-19], [6.4630592206145385e-10, 3.8071204661168884e-10, 1.3006671312744052e-10, 2.4916808882555690e-11, 2.5244555019973249e-12, 1.2272739518568718e-13, 2.4203663923439903e-15, 1.3991887235016583e-17, 1.0464233917273273e-20], [-7.0946656245853033e-12, -4.1791736619300631e-12, -1.4277756476466675e-12, -2.7351820330134102e-13, -2.7711596522054685e-14, -1.3472102017620291e-15, -2.6568986463750055e-17, -1.5359257153840410e-19, -1.1486862639985787e-22], [7.9322150822611867e-14, 4.6725396797222852e-14, 1.5963297685377807e-14, 3.0580809455542506e-15, 3.0983069039087372e-16, 1.5062548521069656e-17, 2.9705603847547827e-19, 1.7172521536362794e-21, 1.2842988622416169e-24], [-8.9838110747433256e-16, -5.2919947421260061e-16, -1.8079632292358360e-16, -3.4635134403996465e-17, -3.5090833522934274e-18, -1.7059631199723656e-19, -3.3644366989268334e-21, -1.9449674329392858e-23, -1.4546280602694680e-26], [1.0272616025849080e-17, 6.0512076064407828e-18, 2.0673633758663798e-18, 3.9605128284849040e-19, 4.0127211781882841e-20, 1.9508790478680544e-21, 3.8476490229735015e-23, 2.2244868456043740e-25, 1.6639137595289789e-28], [-1.1833025557458756e-19, -6.9706321884542811e-20, -2.3816549692915105e-20, -4.5631479711848312e-21, -4.6241001219945581e-22, -2.2486733503719271e-23, -4.4365807002221189e-25, -2.5664028778514514e-27, -1.9215842573914956e-30], [1.3708574151505053e-21, 8.0772546895127694e-22, 2.7610102693505827e-22, 5.2938316726337845e-23, 5.3702932218346357e-24, 2.6155608574744850e-25, 5.1720084533066406e-27, 3.0021791236442252e-29, 2.2618429756615391e-32], [-1.5944326510624937e-23, -9.4060219956703352e-24, -3.2233372023411293e-24, -6.2052179324420544e-25, -6.3320600571621982e-26, -3.1100151980551149e-27, -6.2247783550909412e-29, -3.6805999001566825e-31, -2.8641156498179599e-34], [1.8543685682381306e-25, 1.1006655031465938e-25, 3.8195201133608800e-26, 7.4990614373009020e-27, 7.8699462407833073e-28, 4.0169279051472867e-29, 8.4746925336737666e-31, 5.3979548624969678e-33, 4.7191641704071819e-36], [-2.1285861979182319e-27, -1.3012471933648774e-27, -4.7666920197979638e-28, -1.0128102402171532e-28, -1.1758517655891990e-29, -6.7660326358754080e-31, -1.6381796746828617e-32, -1.2243067537401830e-34, -1.2966782576609475e-37]],
        [[5.2141970139432394e-2, 3.0714674705282351e-2, 1.0493381586177216e-2, 2.0102113507360180e-3, 2.0366528941072238e-4, 9.9012679578408522e-6, 1.9526769920797910e-7, 1.1288223204498164e-9, 8.4422211658979742e-13], [-6.0639422953050746e-4, -3.5720172163392356e-4, -1.2203463016652410e-4, -2.3378107117230019e-5, -2.3685613705057677e-6, -1.1514854039106546e-7, -2.2709001155266103e-9, -1.3127838082366311e-11, -9.8180298629526735e-15], [5.2890667942054764e-6, 3.1155701567111884e-6, 1.0644054292151737e-6, 2.0390756383169919e-7, 2.0658968513746041e-8, 1.0043438603559659e-9, 1.9807151534584855e-11, 1.1450308907965600e-13, 8.5634416035042285e-17], [-5.1257723049638235e-8, -3.0193801373356610e-8, -1.0315430079889195e-8, -1.9761212783625088e-9, -2.0021144141087529e-10, -9.7333577822271046e-12, -1.9195626134195607e-13, -1.1096792415574385e-15, -8.2990541656393339e-19], [5.2158894540648389e-10, 3.0724644169849618e-10, 1.0496787561204472e-10, 2.0108638316922760e-11, 2.0373139578263382e-12, 9.9044817469844695e-14, 1.9533107995433122e-15, 1.1291887184480328e-17, 8.4449613844421521e-21], [-5.4592333474227109e-12, -3.2158082256518450e-12, -1.0986508296963116e-12, -2.1046793669389284e-13, -2.1323635103684329e-14, -1.0366568903761865e-15, -2.0444412527867819e-17, -1.1818702952890811e-19, -8.8389557399052538e-23], [5.8197419200869031e-14, 3.4281689079107600e-14, 1.1712018833596834e-14, 2.2436650560306666e-15, 2.2731774135673906e-16, 1.1051141565476123e-17, 2.1794492399706170e-19, 1.2599170985777726e-21, 9.4226522366890510e-25], [-6.2846279105425470e-16, -3.7020141549126629e-16, -1.2647586713514820e-16, -2.4228916432823458e-17, -2.4547620144735100e-18, -1.1933925941459759e-19, -2.3535484756948465e-21, -1.3605629871746129e-23, -1.0175373431091248e-26], [6.8519028256550639e-18, 4.0361738678260156e-18, 1.3789223188569723e-18, 2.6415976941739513e-19, 2.6763498499373440e-20, 1.3011218631491171e-21, 2.5660164677294347e-23, 1.4833972307148743e-25, 1.1094138571548300e-28], [-7.5257023558696350e-20, -4.4330941117559932e-20, -1.5145355182543844e-20, -2.9014190332468106e-21, -2.9396301630871108e-22, -1.4291453549217801e-23, -2.8185797390777477e-25, -1.6294737878581546e-27, -1.2187567173035461e-30], [8.3142730250880835e-22, 4.8977032091803080e-22, 1.6733320712208728e-22, 3.2058305606003225e-23, 3.2483516809805100e-24, 1.5794442448401234e-25, 3.1155994147330626e-27, 1.8017162842197232e-29, 1.3482865095254305e-32], [-9.2287024048668313e-24, -5.4369860885409185e-24, -1.8580210646633132e-24, -3.5610101129839168e-25, -3.6102452419989446e-26, -1.7568022327713621e-27, -3.4694509146198494e-29, -2.0098947166059792e-31, -1.5088036503020985e-34], [1.0280531107093003e-25, 6.0603393835491495e-26, 2.0737117655388893e-26, 3.9825088132258797e-27, 4.0497563440143393e-28, 1.9791076214802594e-29, 3.9327822633071932e-31, 2.2998983586025503e-33, 1.7553785218547968e-36], [-1.1511875363493983e-27, -6.7970227746105430e-28, -2.3409799532480499e-28, -4.5390757141877092e-29, -4.6857875546941448e-30, -2.3406239313411875e-31, -4.7733937229345361e-33, -2.9190463466794455e-35, -2.3769199299124007e-38]],
        [[5.0969641389623463e-2, 3.0024104400751398e-2, 1.0257454694974306e-2, 1.9650149656865416e-3, 1.9908620132724808e-4, 9.6786537939437211e-6, 1.9087741750058652e-7, 1.1034425571583523e-9, 8.2524113340377201e-13], [-5.6640802667439484e-4, -3.3364750590059517e-4, -1.1398755247403410e-4, -2.1836532860652141e-5, -2.2123762176365784e-6, -1.0755553790120188e-7, -2.1211548371855377e-9, -1.2262176156410060e-11, -9.1706197877415870e-15], [4.7206740480502910e-6, 2.7807535347783446e-6, 9.5001845917391816e-7, 1.8199451476689282e-7, 1.8438840029229961e-8, 8.9641144295823113e-10, 1.7678564074366673e-11, 1.0219794570013918e-13, 7.6431661978234457e-17], [-4.3715454984820589e-8, -2.5750963683607740e-8, -8.7975761012197640e-9, -1.6853468247963658e-9, -1.7075152257201488e-10, -8.3011522684469337e-12, -1.6371104298336952e-13, -9.4639656314648651e-16, -7.0778978693119384e-19], [4.2506450758686514e-10, 2.5038789375237429e-10, 8.5542684040191293e-11, 1.6387365028010303e-11, 1.6602918095708918e-12, 8.0715737779888945e-14, 1.5918341442225163e-15, 9.2022281195545722e-18, 6.8821499716892778e-21], [-4.2511743515070235e-12, -2.5041907119335044e-12, -8.5553335525483961e-13, -1.6389405528400698e-13, -1.6604985437822404e-14, -8.0725788256866363e-16, -1.5920323548878307e-17, -9.2033739578266041e-20, -6.8830069234660365e-23], [4.3304376723968205e-14, 2.5508814516115684e-14, 8.7148481064387171e-15, 1.6694986698985648e-15, 1.6914586127578130e-16, 8.2230924313252604e-18, 1.6217158761604480e-19, 9.3749713542074010e-22, 7.0113410018533230e-25], [-4.4684660674840148e-16, -2.6321882692332612e-16, -8.9926253052177071e-17, -1.7227123120144868e-17, -1.7453722311106235e-18, -8.4851957716897585e-20, -1.6734065927351635e-21, -9.6737904427442204e-24, -7.2348219549095820e-27], [4.6552288392083951e-18, 2.7422025547455991e-18, 9.3684793478634089e-19, 1.7947146225003059e-19, 1.8183218655770520e-20, 8.8398448936390435e-22, 1.7433491191049394e-23, 1.0078124913267333e-25, 7.5372202149059275e-29], [-4.8857207617545790e-20, -2.8779764123153863e-20, -9.8323423896809908e-21, -1.8835779383421454e-21, -1.9083560199800752e-22, -9.2775630514962671e-24, -1.8296774861397219e-25, -1.0577213932104701e-27, -7.9105219478024103e-31], [5.1577816250629199e-22, 3.0382408145031772e-22, 1.0379903446233191e-22, 1.9884839116183216e-23, 2.0146567005212942e-24, 9.7944504893915899e-26, 1.9316444887015307e-27, 1.1166930143795265e-29, 8.3518911196480974e-33], [-5.4710055178633484e-24, -3.2227805341912790e-24, -1.1010588982192662e-24, -2.1093721171083910e-25, -2.1372358024206963e-26, -1.0391071284190595e-27, -2.0495049823196893e-29, -1.1850038986071225e-31, -8.8650602613122081e-35], [5.8264928376378837e-26, 3.4323309812562466e-26, 1.1727826036298235e-26, 2.2472243629176031e-27, 2.2775662336334574e-28, 1.1077632637338803e-29, 2.1861690786471767e-31, 1.2651140401289787e-33, 9.4784891512279554e-37], [-6.2758111050895173e-28, -3.6954611709134666e-28, -1.2617548442972505e-28, -2.4197603927560590e-29, -2.4571564496190751e-30, -1.1973437681043146e-31, -2.3741492989110621e-33, -1.3751184807565724e-35, -1.0363471749471883e-38]],
        [[4.9873007112966961e-2, 2.9378122574823143e-2, 1.0036761040809221e-2, 1.9227368034950069e-3, 1.9480277404715651e-4, 9.4704132960129077e-6, 1.8677060581888943e-7, 1.0797015046904473e-9, 8.0748570706126534e-13], [-5.3063147345156046e-4, -3.1257302038773262e-4, -1.0678765143842917e-4, -2.0457251771225774e-5, -2.0726338556436935e-6, -1.0076190814152859e-7, -1.9871743754819686e-9, -1.1487649000671530e-11, -8.5913674617304256e-15], [4.2342609864816493e-6, 2.4942277491486355e-6, 8.5212960208063978e-7, 1.6324200014389337e-7, 1.6538922233783180e-8, 8.0404619385259807e-10, 1.5856984277069027e-11, 9.1667581784288863e-14, 6.8556227596352986e-17], [-3.7542112483785263e-8, -2.2114503337812326e-8, -7.5552134065918316e-9, -1.4473480853084009e-9, -1.4663859427739624e-10, -7.1288927980930950e-12, -1.4059234640565974e-13, -8.1274977556884416e-16, -6.0783820744726016e-19], [3.4950120667208169e-10, 2.0587668328088885e-10, 7.0335844937069403e-11, 1.3474199207850468e-11, 1.3651433617867322e-12, 6.6366980181226736e-14, 1.3088553484825970e-15, 7.5663570452339450e-18, 5.6587169157570010e-21], [-3.3466701027297753e-12, -1.9713847266701962e-12, -6.7350516939087366e-13, -1.2902301561948982e-13, -1.3072013451384986e-14, -6.3550106307394963e-16, -1.2533024150096266e-17, -7.2452112976219473e-20, -5.4185388667452263e-23], [3.2639683667082535e-14, 1.9226685598072486e-14, 6.5686174625346079e-15, 1.2583464419104013e-15, 1.2748982448925099e-16, 6.1979678420635838e-18, 1.2223312465002190e-19, 7.0661701856883554e-22, 5.2846378431364845e-25], [-3.2246514758322621e-16, -1.8995086083724173e-16, -6.4894936551181569e-17, -1.2431887382779882e-17, -1.2595411637504392e-18, -6.1233087968509668e-20, -1.2076073767842338e-21, -6.9810530394841921e-24, -5.2209805691168145e-27], [3.2164405914588763e-18, 1.8946719197525227e-18, 6.4729695833522374e-19, 1.2400232379048642e-19, 1.2563340359121702e-20, 6.1077172899073915e-22, 1.2045325201591387e-23, 6.9632777849158146e-26, 5.2076870560736469e-29], [-3.2320151458517618e-20, -1.9038462721632335e-20, -6.5043130972658815e-21, -1.2460277573313677e-21, -1.2624176245574354e-22, -6.1372935023470615e-24, -1.2103655593464293e-25, -6.9969994648223405e-28, -5.2329086829294694e-31], [3.2667685733841567e-22, 1.9243182849354431e-22, 6.5742553462396084e-23, 1.2594270196561071e-23, 1.2759938067476491e-24, 6.2032993336875669e-26, 1.2233842030429555e-27, 7.0722703334509635e-30, 5.2892168456607897e-33], [-3.3176896575105880e-24, -1.9543151600829547e-24, -6.6767478993178617e-25, -1.2790650410076447e-25, -1.2958949570122275e-26, -6.3000808488501377e-28, -1.2424794409837985e-29, -7.1827403454089768e-32, -5.3719276792550137e-35], [3.3832835544741302e-26, 1.9928204187693200e-26, 6.8086725597644318e-27, 1.3043339638266016e-27, 1.3215335087082367e-28, 6.4251911839674769e-30, 1.2671565791129675e-31, 7.3277295130502146e-34, 5.4793238802771894e-37], [-3.5012746070121872e-28, -2.0772398050694714e-28, -7.0891830455798963e-29, -1.3587600837361468e-29, -1.3692811638894851e-30, -6.7128976043740101e-32, -1.3155326721133907e-33, -7.5894953122018977e-36, -5.7735418510933537e-39]],
        [[4.8844255569902510e-2, 2.8772127655312305e-2, 9.8297285395462869e-3, 1.8830757008664467e-3, 1.9078449510238955e-4, 9.2750630884414403e-6, 1.8291800979434957e-7, 1.0574300465751713e-9, 7.9082935896378350e-13], [-4.9846916748228584e-4, -2.9362753821710468e-4, -1.0031510449928396e-4, -1.9217309506819720e-5, -1.9470086570592845e-6, -9.4654589820178347e-8, -1.8667289939390517e-9, -1.0791366739794749e-11, -8.0706328222992252e-15], [3.8152289076680204e-6, 2.2473933093025355e-6, 7.6780092236097516e-7, 1.4708720125729260e-7, 1.4902192946881621e-8, 7.2447595735846003e-10, 1.4287741118333878e-11, 8.2595949809423778e-14, 6.1771747693711850e-17], [-3.2445871801292847e-8, -1.9112519055975430e-8, -6.5296135300740163e-9, -1.2508744799069198e-9, -1.2673279994834982e-10, -6.1611647962531501e-12, -1.2150731394486005e-13, -7.0242118197322857e-16, -5.2532580747220545e-19], [2.8972583144215745e-10, 1.7066548583927818e-10, 5.8306268377763085e-11, 1.1169699829313146e-11, 1.1316621744947740e-12, 5.5016200648847466e-14, 1.0850011297147069e-15, 6.2722790195360940e-18, 4.6909035849016165e-21], [-2.6610268446866978e-12, -1.5675006851106852e-12, -5.3552196086367927e-13, -1.0258964809922503e-13, -1.0393907269018860e-14, -5.0530388019143943e-16, -9.9653424698773955e-18, -5.7608611442453678e-20, -4.3084250731719946e-23], [2.4893164879797479e-14, 1.4663532268229876e-14, 5.0096587695779827e-15, 9.5969758073185128e-16, 9.7232107189036470e-17, 4.7269770424583219e-18, 9.3223002874790590e-20, 5.3891251268191579e-22, 4.0304116412375129e-25], [-2.3589285451404570e-16, -1.3895470908377256e-16, -4.7472577835729246e-17, -9.0942956790265189e-18, -9.2139185308804158e-19, -4.4793826472197763e-20, -8.8340073939140174e-22, -5.1068480692278190e-24, -3.8193026565261019e-27], [2.2568639049701101e-18, 1.3294250393274324e-18, 4.5418564139292578e-19, 8.7008094055761260e-20, 8.8152564953668443e-21, 4.2855715373768052e-22, 8.4517831289395948e-24, 4.8858881923539193e-26, 3.6540514904683906e-29], [-2.1752093623629270e-20, -1.2813257320108493e-20, -4.3775296338987182e-21, -8.3860095203991048e-22, -8.4963158907768165e-23, -4.1305173369119246e-24, -8.1459933054753081e-26, -4.7091143294811179e-28, -3.5218461703755368e-31], [2.1088414123430838e-22, 1.2422311307925977e-22, 4.2439666290334728e-23, 8.1301438558730204e-24, 8.2370849300367304e-25, 4.0044913693571302e-26, 7.8974520627245905e-28, 4.5654356856633935e-30, 3.4143926341408230e-33], [-2.0542781489651659e-24, -1.2100908785869310e-24, -4.1341639766391730e-25, -7.9197944142097301e-26, -8.0239682510397989e-27, -3.9008844355088488e-28, -7.6931422091825041e-30, -4.4473211618990045e-32, -3.3260673333540872e-35], [2.0092794380846813e-26, 1.1837421354916440e-26, 4.0440038664033039e-27, 7.7469310423126122e-28, 7.8492650547747788e-29, 3.8159756869177995e-30, 7.5253240680239226e-32, 4.3507816732045513e-34, 3.2538218244542124e-37], [-2.0182161051966850e-28, -1.1791357512772284e-28, -4.0425599692107118e-29, -7.8027676032602870e-30, -7.8077199945458541e-31, -3.8185000308091928e-32, -7.5554059760280514e-34, -4.4290947861339761e-36, -3.2562653046198446e-39]],
        [[4.7876659210451385e-2, 2.8202156721205206e-2, 9.6350032962544524e-3, 1.8457722928920607e-3, 1.8700508684348789e-4, 9.0913256729901650e-6, 1.7929443526567729e-7, 1.0364825379786673e-9, 7.7516316444915286e-13], [-4.6942977709062851e-4, -2.7652163625110033e-4, -9.4471032946276362e-5, -1.8097763927171251e-5, -1.8335814920976917e-6, -8.9140283689603010e-8, -1.7579786929239979e-9, -1.0162692526704964e-11, -7.6004607985846408e-15], [3.4520351951481442e-6, 2.0334509380184944e-6, 6.9470951049103432e-7, 1.3308511960462267e-7, 1.3483566984442670e-8, 6.5550889956133284e-10, 1.2927608380331959e-11, 7.4733163492697661e-14, 5.5891337653666999e-17], [-2.8205669711465020e-8, -1.6614791648946962e-8, -5.6762883025828328e-9, -1.0874034344593966e-9, -1.1017067190686138e-10, -5.3559904429535791e-12, -1.0562808068912588e-13, -6.1062498115042707e-16, -4.5667338844256681e-19], [2.4198395369585643e-10, 1.4254272329548088e-10, 4.8698389360285545e-11, 9.3291237196179590e-12, 9.4518354082955299e-13, 4.5950468703684396e-14, 9.0621144074696468e-16, 5.2387143675648019e-18, 3.9179226451091164e-21], [-2.1353595070814853e-12, -1.2578518315179653e-12, -4.2973332368452488e-13, -8.2323776941276962e-14, -8.3406632093636818e-15, -4.0548461458974877e-16, -7.9967584043087474e-18, -4.6228431095581340e-20, -3.4573256781978311e-23], [1.9192178219319850e-14, 1.1305317181455068e-14, 3.8623559675005380e-15, 7.3990941267983507e-16, 7.4964189519681624e-17, 3.6444134875635304e-18, 7.1873242872477386e-20, 4.1549176400753662e-22, 3.1073742083402304e-25], [-1.7473558092327237e-16, -1.0292949255941703e-16, -3.5164899262733807e-17, -6.7365204500607979e-18, -6.8251300371198736e-19, -3.3180637476532055e-20, -6.5437141646104635e-22, -3.7828533022503595e-24, -2.8291152325425910e-27], [1.6061804919776629e-18, 9.4613439418400692e-19, 3.2323797420545909e-19, 6.1922521297245214e-20, 6.2737026217749915e-21, 3.0499851461411208e-22, 6.0150233755609386e-24, 3.4772226397563703e-26, 2.6005405846976490e-29], [-1.4873475294514801e-20, -8.7613481858546398e-21, -2.9932327334483396e-21, -5.7341195191439342e-22, -5.8095439129413909e-23, -2.8243325702289058e-24, -5.5700030078625895e-26, -3.2199609815817737e-28, -2.4081400866517697e-31], [1.3854081415073414e-22, 8.1608653482910099e-23, 2.7880834077787840e-23, 5.3411160886177944e-24, 5.4113710961406267e-25, 2.6307593043289684e-26, 5.1882478973920318e-28, 2.9992722601209977e-30, 2.2430917536402815e-33], [-1.2966264969597528e-24, -7.6378958149371143e-25, -2.6094159368329752e-25, -4.9988377604673703e-26, -5.0646005863590448e-27, -2.4621701267468012e-28, -4.8557835443121607e-30, -2.8070763955333947e-32, -2.0993594421716791e-35], [1.2186407784665464e-26, 7.1784229354830232e-27, 2.4524488165161547e-27, 4.6982389669174575e-28, 4.7593800891976731e-29, 2.3139016533628146e-30, 4.5631857777209761e-32, 2.6373055399520036e-34, 1.9725362618970675e-37], [-1.2072389210257270e-28, -6.8623855353288554e-29, -2.3936998092800077e-29, -4.5561999827218037e-30, -4.6458932915604092e-31, -2.2581528597940340e-32, -4.5520514952299874e-34, -2.5449452695302525e-36, -1.9203458214465662e-39]],
        [[4.6964388541286036e-2, 2.7664775859460710e-2, 9.4514121466329346e-3, 1.8106018371306879e-3, 1.8344177940881226e-4, 8.9180940839011680e-6, 1.7587805122521072e-7, 1.0167327761094518e-9, 7.6039273914366314e-13], [-4.4310463904574365e-4, -2.6101458790869773e-4, -8.9173194792576421e-5, -1.7082859980005280e-5, -1.7307561319444120e-6, -8.4141388459665445e-8, -1.6593930598224663e-9, -9.5927792047778437e-12, -7.1742347910068381e-15], [3.1354650418607511e-6, 1.8469725741664473e-6, 6.3100092011065191e-7, 1.2088049991455650e-7, 1.2247051530276605e-8, 5.9539521557947644e-10, 1.1742077313802539e-11, 6.7879731333087302e-14, 5.0765802041131191e-17], [-2.4652122345502950e-8, -1.4521544096093255e-8, -4.9611498374293016e-9, -9.5040475122335891e-10, -9.6290600808894731e-11, -4.6812053403350335e-12, -9.2320316975509855e-14, -5.3369417909697574e-16, -3.9913848382211659e-19], [2.0351463373151769e-10, 1.1988204043907065e-10, 4.0956578825181219e-11, 7.8460293248220098e-12, 7.9492329628912474e-13, 3.8645507957009627e-14, 7.6214677308203118e-16, 4.4058914628653696e-18, 3.2950721728845184e-21], [-1.7281095340394669e-12, -1.0179577421256428e-12, -3.4777574984021188e-13, -6.6623209505736681e-14, -6.7499545460674928e-15, -3.2815168876951377e-16, -6.4716383325928178e-18, -3.7411870111341514e-20, -2.7979539028244722e-23], [1.4945681652352809e-14, 8.8038819586827666e-15, 3.0077639994094391e-15, 5.7619569843077951e-16, 5.8377475400858942e-17, 2.8380438724662985e-18, 5.5970437280101420e-20, 3.2355929395072859e-22, 2.4198308895287505e-25], [-1.3093748912842235e-16, -7.7129850954071470e-17, -2.6350692804404165e-17, -5.0479877568689119e-18, -5.1143870373043383e-19, -2.4863793257547866e-20, -4.9035090492030564e-22, -2.8346677334354805e-24, -2.1199874864254082e-27], [1.1581590660614006e-18, 6.8222353079581975e-19, 2.3307529395612837e-19, 4.4650106130244771e-20, 4.5237416373686755e-21, 2.1992347470391747e-22, 4.3372173231014169e-24, 2.5073003588513541e-26, 1.8751564152693054e-29], [-1.0319948426078559e-20, -6.0790541282813225e-21, -2.0768520346032269e-21, -3.9786140421740471e-22, -4.0309471950817715e-23, -1.9596607955583397e-24, -3.8647419336456399e-26, -2.2341672362758061e-28, -1.6708859838884034e-31], [9.2498357180511061e-23, 5.4486948889425991e-23, 1.8614957405710176e-23, 3.5660571429262072e-24, 3.6129636161787808e-25, 1.7564564568118038e-26, 3.4639928076627021e-28, 2.0024982987598163e-30, 1.4976257001966786e-33], [-8.3303446759463522e-25, -4.9070560128162015e-25, -1.6764491614106211e-25, -3.2115650873997237e-26, -3.2538049351100715e-27, -1.5818528613895219e-28, -3.1196467952017493e-30, -1.8034349526794511e-32, -1.3487539037412512e-35], [7.5343823321621259e-27, 4.4392161365180913e-27, 1.5165216996789399e-27, 2.9050947387416424e-28, 2.9435363004316116e-29, 1.4308283822551172e-30, 2.8217775477041892e-32, 1.6316575282412064e-34, 1.2198951732951020e-37], [-7.0434009394733197e-29, -4.3605695216279322e-29, -1.4833402378530811e-29, -2.9032018247391590e-30, -2.9153076701038787e-31, -1.3832303993438326e-32, -2.7583142869809380e-34, -1.7034172601647970e-36, -1.2282997611131325e-39]],
    ],
    [
        [[1.4739365284535190e-1, 1.3723704103650652e-1, 1.1963719511538988e-1, 9.8596135656774823e-2, 7.7651260632771818e-2, 5.8884809278563742e-2, 4.2927543172615666e-2, 2.9492807371488285e-2, 1.7919113819157273e-2, 7.5004071601224609e-3], [-5.2523323979475460e-3, -1.1441470210449963e-2, -2.0980792926695068e-2, -2.9941080498092973e-2, -3.5332480007051223e-2, -3.6036052321489763e-2, -3.2483059653055281e-2, -2.5812353161733617e-2, -1.7193977911221713e-2, -7.5505356502646732e-3], [1.0515594277275045e-4, 4.7623216149863864e-4, 1.3978542816585130e-3, 2.9165411457483862e-3, 4.7067635736055532e-3, 6.1717868393895085e-3, 6.7568033049772473e-3, 6.1915243335684437e-3, 4.5363811272700001e-3, 2.0976921706099721e-3], [-2.1988106231114222e-6, -1.7626281216061103e-5, -7.6447449184796746e-5, -2.2011131182096097e-4, -4.6410486344678127e-4, -7.5732331675504737e-4, -9.8592560796732288e-4, -1.0288823434888813e-3, -8.2371555234141627e-4, -3.9992800785653686e-4], [4.6156160765059553e-8, 5.9728012299407119e-7, 3.6552507155076880e-6, 1.3954148807349889e-5, 3.7210452196821966e-5, 7.3690160363267274e-5, 1.1201178578968756e-4, 1.3147398477167539e-4, 1.1412910038210993e-4, 5.7951090888872183e-5], [-9.5790971260678317e-10, -1.8918828530628193e-8, -1.5778295756392292e-7, -7.7512800370312891e-7, -2.5496960870528251e-6, -6.0056511309204132e-6, -1.0494421097545084e-5, -1.3699451241936187e-5, -1.2799520907676412e-5, -6.7702483529951448e-6], [1.9559341925110698e-11, 5.6728366720472189e-10, 6.2708628971772689e-9, 3.8713271291168140e-8, 1.5394252705894816e-7, 4.2411349677421726e-7, 8.4068731390119589e-7, 1.2084033541764668e-6, 1.2069742988343804e-6, 6.6259581821340198e-7], [-3.9280078565802545e-13, -1.6238766457822180e-11, -2.3252005077868422e-10, -1.7687437178776274e-9, -8.3597040400692110e-9, -2.6556047545758578e-8, -5.9025069354021233e-8, -9.2597726903131535e-8, -9.8271376982250838e-8, -5.5801619402234205e-8], [7.7642308776166224e-15, 4.4645182065101347e-13, 8.1200612773811349e-12, 7.4839590177147807e-11, 4.1433804719122303e-10, 1.4989460421305501e-9, 3.6978788851932442e-9, 6.2816970912562806e-9, 7.0445388653743131e-9, 4.1248241549941662e-9], [-1.5125376184684668e-16, -1.1842282617261191e-14, -2.6895611511200370e-13, -2.9596466505190388e-12, -1.8950042271086961e-11, -7.7222863505330796e-11, -2.0954320360424009e-10, -3.8272936960955761e-10, -4.5129492526731661e-10, -2.7172907044729864e-10], [2.9070161754190597e-18, 3.0413370673488648e-16, 8.4954045841872540e-15, 1.1016899791264302e-13, 8.0656256326118739e-13, 3.6663708186325375e-12, 1.0854322500199713e-11, 2.1181493910631651e-11, 2.6143981050987841e-11, 1.6146340119995770e-11], [-5.5183313324309082e-20, -7.5836315008013752e-18, -2.5699985126580683e-16, -3.8816924287647399e-15, -3.2163504776020669e-14, -1.6166056191146132e-13, -5.1836130082179374e-13, -1.0745590327945768e-12, -1.3827072049410873e-12, -8.7390870089674341e-13], [1.0353934334841669e-21, 1.8401690418998213e-19, 7.4719783287676007e-18, 1.3004476840812233e-16, 1.2082625140785786e-15, 6.6615892182203640e-15, 2.2981976235411763e-14, 5.0346456323991845e-14, 6.7290782515052749e-14, 4.3433380010531152e-14], [-1.9211376143880182e-23, -4.3510057401293394e-21, -2.0923039783508983e-19, -4.1543901019486557e-18, -4.2906811294029858e-17, -2.5755935727669142e-16, -9.5011043249506165e-16, -2.1889015672343672e-15, -3.0283437469752769e-15, -1.9923357955784811e-15]],
        [[1.3765467709805797e-1, 1.1759250067860784e-1, 8.6524990214610970e-2, 5.5749847549479536e-2, 3.2226498235740732e-2, 1.7220364026153099e-2, 8.7677316513476111e-3, 4.3341817935327044e-3, 2.0309842902171115e-3, 7.2678213178496186e-4], [-4.5053803219134360e-3, -8.3398296779946900e-3, -1.2669093595122671e-2, -1.4296223590280829e-2, -1.2713724242724378e-2, -9.4541145811530084e-3, -6.1671101717420835e-3, -3.6381086134318723e-3, -1.9126886674015291e-3, -7.2752341672723469e-4], [8.2642477072380779e-5, 3.1160341434574513e-4, 7.4875307777690759e-4, 1.2302031790551806e-3, 1.5105493526856389e-3, 1.4739574560740647e-3, 1.1987451409708220e-3, 8.3732560527448599e-4, 4.9485515040089111e-4, 2.0086509001315966e-4], [-1.5913639687988723e-6, -1.0486954661572008e-5, -3.6812070938452170e-5, -8.3369530858403327e-5, -1.3490456470100470e-4, -1.6657301914991560e-4, -1.6464515258796893e-4, -1.3399812715741660e-4, -8.8232522977431949e-5, -3.8066304178488521e-5], [3.0927669258902522e-8, 3.2515469432593376e-7, 1.5980885451150389e-6, 4.8010765974457530e-6, 9.9056634635781385e-6, 1.5064147347395775e-5, 1.7720311870091060e-5, 1.6550792731980723e-5, 1.2023335614904167e-5, 5.4850672863498607e-6], [-5.9672336508770767e-10, -9.4695555690996070e-9, -6.3099017366001452e-8, -2.4434861171744335e-7, -6.2693094603141768e-7, -1.1494827422581486e-6, -1.5813837923282740e-6, -1.6725446361803975e-6, -1.3281928013025666e-6, -6.3746643143282900e-7], [1.1356957489850619e-11, 2.6212142446939002e-10, 2.3073682778781284e-9, 1.1258266101015970e-8, 3.5205179283136172e-8, 7.6469015640555605e-8, 1.2122932472844977e-7, 1.4350194750256020e-7, 1.2353895783006472e-7, 6.2086272167796563e-8], [-2.1302528954452824e-13, -6.9502216313317784e-12, -7.9102589468095044e-11, -4.7722894496778982e-10, -1.7884466536705326e-9, -4.5340149161315059e-9, -8.1780612108155257e-9, -1.0723515837074217e-8, -9.9336064249291152e-9, -5.2051914087602897e-9], [3.9379412790840671e-15, 1.7751814342031317e-13, 2.5647487789141023e-12, 1.8826345994544876e-11, 8.3338309715401902e-11, 2.4342910994107741e-10, 4.9400359306594935e-10, 7.1103397970389979e-10, 7.0401651669649010e-10, 3.8315440826795779e-10], [-7.1841770750290247e-17, -4.3859035069944365e-15, -7.9162304602955306e-14, -6.9712099272504255e-13, -3.5991831169923659e-12, -1.1975982794275529e-11, -2.7074159835446160e-11, -4.2428030155174845e-11, -4.4633916249506266e-11, -2.5142349694431135e-11], [1.2941072108446159e-18, 1.0516394884423070e-16, 2.3377795198518181e-15, 2.4390500046318894e-14, 1.4521905072819381e-13, 5.4487802699225028e-13, 1.3601199814104085e-12, 2.3037701245667543e-12, 2.5611112045869187e-12, 1.4885267339019153e-12], [-2.3052020293195703e-20, -2.4535600273065530e-18, -6.6318769512947106e-17, -8.1054067200521281e-16, -5.5088121680836128e-15, -2.3095358880020069e-14, -6.3148365421731445e-14, -1.1484829199560816e-13, -1.3426934443569806e-13, -8.0290191886600895e-14], [4.0605761492404926e-22, 5.5816960198521862e-20, 1.8130987977601335e-18, 2.5692616262464518e-17, 1.9748835436336462e-16, 9.1745175062394979e-16, 2.7278834342616894e-15, 5.2953311932475536e-15, 6.4817886988751902e-15, 3.9776436730816446e-15], [-7.0841333778839540e-24, -1.2397413285670112e-21, -4.7867260730911745e-20, -7.7890022873710790e-19, -6.7125291133639156e-18, -3.4285750655688395e-17, -1.1010523154514302e-16, -2.2685767027882219e-16, -2.8954662719903898e-16, -1.8191075715910277e-16]],
        [[1.2924997966082390e-1, 1.0306132854090987e-1, 6.6031953967503901e-2, 3.4556731349296028e-2, 1.5177657795943776e-2, 5.8219672445144802e-3, 2.0553530611193675e-3, 7.0693319780915878e-4, 2.4375133758767500e-4, 7.1786874317173822e-5], [-3.9130335776870744e-3, -6.2743944536126636e-3, -8.0908922677652168e-3, -7.4449155244789544e-3, -5.1319294936241054e-3, -2.8239378507566256e-3, -1.3239865516283347e-3, -5.6299610644666292e-4, -2.2408612563024900e-4, -7.1354562567286777e-5], [6.6164315179931941e-5, 2.1167554318080878e-4, 4.2680710236387684e-4, 5.6695509256125621e-4, 5.4140343372958443e-4, 3.9701742705983290e-4, 2.3780850891133069e-4, 1.2317898257465447e-4, 5.6559996888405520e-5, 1.9549552903201128e-5], [-1.1789867896003988e-6, -6.5140393540916376e-6, -1.8944239413364851e-5, -3.4528078228338856e-5, -4.3635526868791777e-5, -4.1013537071286984e-5, -3.0463648142425128e-5, -1.8833814608898528e-5, -9.8574943897627598e-6, -3.6778023822385521e-6], [2.1300340908111497e-8, 1.8569906833147475e-7, 7.4919266590894396e-7, 1.8070845561547392e-6, 2.9249681554496113e-6, 3.4252752243931405e-6, 3.0817260360582833e-6, 2.2332289297336812e-6, 1.3158630855917479e-6, 5.2634662377246703e-7], [-3.8356932904084599e-10, -4.9933526391410287e-9, -2.7132023378929742e-8, -8.4277660269519548e-8, -1.7047460130555584e-7, -2.4331774193430502e-7, -2.6015466191181450e-7, -2.1756447527074323e-7, -1.4268198480343532e-7, -6.0787918423020394e-8], [6.8288593765933081e-12, 1.2806927018312620e-10, 9.1491735369266237e-10, 3.5816298962109462e-9, 8.8773966680396104e-9, 1.5168449001848115e-8, 1.8967718837546446e-8, 1.8060985820286938e-8, 1.3050121525219076e-8, 5.8862364907878667e-9], [-1.2008899621326299e-13, -3.1559609737383177e-12, -2.9053229422876199e-11, -1.4079974020622862e-10, -4.2065792665697889e-10, -8.4749837917230512e-10, -1.2225686537752354e-9, -1.3099794935719285e-9, -1.0334972300569090e-9, -4.9085554972182200e-10], [2.0829107788053443e-15, 7.5111126762506583e-14, 8.7588347145784129e-13, 5.1752027565948971e-12, 1.8375791222128801e-11, 4.3083400811426191e-11, 7.0844248281868679e-11, 8.4539274545389019e-11, 7.2241163750700183e-11, 3.5953348940153696e-11], [-3.5720714013301500e-17, -1.7332295398902430e-15, -2.5221766872752751e-14, -1.7927763083682426e-13, -7.4723365073076701e-13, -2.0153584784529140e-12, -3.7376916424063101e-12, -4.9216935057409203e-12, -4.5227581178410269e-12, -2.3484213986869443e-12], [6.0465522316210108e-19, 3.8896265930048424e-17, 6.9698543019443652e-16, 5.8894456232558460e-15, 2.8498272204447299e-14, 8.7510401721641032e-14, 1.8132062712214075e-13, 2.6129160452862829e-13, 2.5655417224966513e-13, 1.3844328023842514e-13], [-1.0151781736655359e-20, -8.5096923272452504e-19, -1.8552759404467266e-17, -1.8437093073601319e-16, -1.0254562697038089e-15, -3.5518225265216867e-15, -8.1518383563251464e-15, -1.2760373723465000e-14, -1.3309531507742356e-14, -7.4378830362392201e-15], [1.6800719082006517e-22, 1.8185790543877703e-20, 4.7713491043185677e-19, 5.5219961051766075e-18, 3.4982244588006902e-17, 1.3551348470406625e-16, 3.4183911831335283e-16, 5.7733013959746013e-16, 6.3634600077529672e-16, 3.6711202481255356e-16], [-2.7736882753889912e-24, -3.8009413264673127e-22, -1.1878266122076903e-20, -1.5862761475601294e-19, -1.1348574414062583e-18, -4.8776101226822642e-18, -1.3424817078483348e-17, -2.4308611484636948e-17, -2.8175915114072642e-17, -1.6731122100645323e-17]],
        [[1.2191216413559599e-1, 9.1989664281447462e-2, 5.2665567497120648e-2, 2.3168725155214740e-2, 8.0152595645036704e-3, 2.2674551207320250e-3, 5.5782772869412935e-4, 1.3011008854714710e-4, 3.1403800189007693e-5, 7.2614543406736456e-6], [-3.4350470745308393e-3, -4.8497903392152142e-3, -5.4166420790803493e-3, -4.1783652005718539e-3, -2.2994642866718917e-3, -9.5717450383451970e-4, -3.2368347599162215e-4, -9.7000654499178512e-5, -2.7978422557566770e-5, -7.1530046622910759e-6], [5.3834168023420715e-5, 1.4850778063666444e-4, 2.5671748594187257e-4, 2.8261233464830888e-4, 2.1492841735029580e-4, 1.2037746528828424e-4, 5.3109054369454498e-5, 1.9955956561297736e-5, 6.8433510693051490e-6, 1.9409109417628273e-6], [-8.9166907062698857e-7, -4.2005923264738837e-6, -1.0333959684092869e-5, -1.5495480762069061e-5, -1.5600444246959413e-5, -1.1295548354176501e-5, -6.2869211108976459e-6, -2.8887331707397352e-6, -1.1590686822969369e-6, -3.6182776421760139e-7], [1.5029946980882021e-8, 1.1060392615039248e-7, 3.7363985006617188e-7, 7.3806249570378638e-7, 9.5284765343785526e-7, 8.6644923516280169e-7, 5.9308787178145771e-7, 3.2627517669965456e-7, 1.5080560659126407e-7, 5.1350740827325633e-8], [-2.5353541054419691e-10, -2.7569758319032032e-9, -1.2448508034461117e-8, -3.1573022674501878e-8, -5.1043470282605275e-8, -5.7017602160504212e-8, -4.7034726362672880e-8, -3.0435336326840786e-8, -1.5980786160026095e-8, -5.8852129105990366e-9], [4.2350284949274721e-12, 6.5753418460636867e-11, 3.8809199787331809e-10, 1.2384009724158542e-9, 2.4601083732226292e-9, 3.3157428467591320e-9, 3.2412562986349485e-9, 2.4299415678098811e-9, 1.4318004025010555e-9, 5.6589373440962166e-10], [-7.0093172054507822e-14, -1.5107825787305331e-12, -1.1439985775628806e-11, -4.5162926365883172e-11, -1.0851438119562318e-10, -1.7382470625590719e-10, -1.9848563698153395e-10, -1.7015236239980836e-10, -1.1130220035863491e-10, -4.6887404683733075e-11], [1.1430130794320156e-15, 3.3603726506025061e-14, 3.2126980202103471e-13, 1.5467113110827910e-12, 4.4343989386833938e-12, 8.3327060899747962e-12, 1.0976287230746944e-11, 1.0636209675286882e-11, 7.6503536692639348e-12, 3.4140718624283368e-12], [-1.8526953375681779e-17, -7.2618809993539158e-16, -8.6440161427897182e-15, -5.0115793478331974e-14, -1.6941333777317339e-13, -3.6917215344010754e-13, -5.5480865276230286e-13, -6.0152551361765862e-13, -4.7171860493590736e-13, -2.2178950176501276e-13], [2.9422868109116171e-19, 1.5290519986949173e-17, 2.2380706308667637e-16, 1.5451678160264583e-15, 6.0936349894717430e-15, 1.5241169194370261e-14, 2.5874549488662211e-14, 3.1101638085772091e-14, 2.6390094202117154e-14, 1.3009110322842322e-14], [-4.7042401027408475e-21, -3.1440090209385449e-19, -5.5955960872065720e-18, -4.5539744370255488e-17, -2.0751073356960445e-16, -5.9019929230347669e-16, -1.1217639860446509e-15, -1.4825916009242243e-15, -1.3518760526358745e-15, -6.9565827572807718e-16], [7.3048533684878742e-23, 6.3249862375771780e-21, 1.3547760432260730e-19, 1.2877228719549858e-18, 6.7204846452662468e-18, 2.1551685835995296e-17, 4.5486902877987383e-17, 6.5608248999765288e-17, 6.3892558539445788e-17, 3.4186899512241873e-17], [-1.1156656650857676e-24, -1.2462694872601277e-22, -3.1821532979469685e-21, -3.5018876218138290e-20, -2.0759164479567138e-19, -7.4461593397233364e-19, -1.7318259881863978e-18, -2.7069320197143885e-18, -2.7993033093275371e-18, -1.5517976768506074e-18]],
        [[1.1544151235676899e-1, 8.3337308852308178e-2, 4.3554383399456482e-2, 1.6599649928159309e-2, 4.6853181269634292e-3, 1.0098564264145571e-3, 1.7609574766699600e-4, 2.7465788377847095e-5, 4.4167971820381710e-6, 7.5693902374584043e-7], [-3.0434382308763197e-3, -3.8369692861562675e-3, -3.7734030138196606e-3, -2.4997849541081997e-3, -1.1305932595803169e-3, -3.6569936795318318e-4, -9.0426165222715156e-5, -1.8859699162883259e-5, -3.7763158351142386e-6, -7.3692909933118663e-7], [4.4425909463535027e-5, 1.0714215164385533e-4, 1.6174844803992022e-4, 1.5094143357506325e-4, 9.3641301013370862e-5, 4.0892129764915841e-5, 1.3403301097081759e-5, 3.6033131159882206e-6, 8.8737837782793949e-7, 1.9750236429835870e-7], [-6.8683320228598646e-7, -2.7987723553679841e-6, -5.9325776270592170e-6, -7.4704345953804416e-6, -6.1170043135761304e-6, -3.4682572386840907e-6, -1.4533395749476937e-6, -4.8882711948908158e-7, -1.4498975715771790e-7, -3.6397746688007039e-8], [1.0835686220877445e-8, 6.8357722178149079e-8, 1.9684151418645180e-7, 3.2450983566000519e-7, 3.4020486603055422e-7, 2.4331917034708616e-7, 1.2690158488766063e-7, 5.2139435568473391e-8, 1.8271605598620847e-8, 5.1118133035422375e-9], [-1.7185696207281176e-10, -1.5855246217153128e-9, -6.0522974031382725e-9, -1.2754011733710812e-8, -1.6736640854434062e-8, -1.4775281903583361e-8, -9.3919656571671917e-9, -4.6221428592811872e-9, -1.8820010149055779e-9, -5.8032497478760638e-10], [2.6983425615193200e-12, 3.5283455171865231e-11, 1.7492348671699036e-10, 4.6228376613055382e-10, 7.4580786659412351e-10, 7.9855731703312107e-10, 6.0808581372518056e-10, 3.5257425801208537e-10, 1.6439489348023956e-10, 5.5323061185749980e-11], [-4.2267283458218506e-14, -7.5822732464604693e-13, -4.7977518491184635e-12, -1.5653761125611528e-11, -3.0586691264345849e-11, -3.9140142268855892e-11, -3.5184712915178673e-11, -2.3694399188429967e-11, -1.2492054067970041e-11, -4.5480666576793851e-12], [6.4610448618913036e-16, 1.5806809945919548e-14, 1.2576995196891713e-13, 4.9982001819038469e-13, 1.1676897635565048e-12, 1.7631817094929421e-12, 1.8474217448370398e-12, 1.4270532946303293e-12, 8.4124714395255205e-13, 3.2880577808543540e-13], [-1.0036461826837288e-17, -3.2074007443038786e-16, -3.1673644736116380e-15, -1.5152910177328051e-14, -4.1850446413283065e-14, -7.3734904908828297e-14, -8.9039321568707877e-14, -7.8023903792029373e-14, -5.0921050247162734e-14, -2.1220986307364597e-14], [1.4821463129252216e-19, 6.3523634055453707e-18, 7.6955202764159644e-17, 4.3853350866225757e-16, 1.4174273281612331e-15, 2.8847556807630734e-15, 3.9743511995314704e-15, 3.9117710751847636e-15, 2.8014367770252133e-15, 1.2372606135951746e-15], [-2.2125223679216679e-21, -1.2302651119350261e-19, -1.8095218245965182e-18, -1.2166818473427321e-17, -4.5602605261248962e-17, -1.0623627920555740e-16, -1.6546277490335218e-16, -1.8129085861154837e-16, -1.4134003584357677e-16, -6.5796616435449237e-17], [3.7461782781486908e-23, 2.3347513160814398e-21, 4.1286976740930898e-20, 3.2472415189515818e-19, 1.3995815263158541e-18, 3.7010983548287024e-18, 6.4624057241589083e-18, 7.8180674914563171e-18, 6.5879926788069620e-18, 3.2169459285228218e-18], [-3.3552178556186296e-25, -4.3469479420157585e-23, -9.1591074287760993e-22, -8.3560071541810039e-21, -4.1087191617963041e-20, -1.2236621675677097e-19, -2.3764702396013546e-19, -3.1502528072484793e-19, -2.8501155546691191e-19, -1.4533312046653204e-19]],
        [[1.0968586503412189e-1, 7.6425858790404587e-2, 3.7108668681505066e-2, 1.2575344325662927e-2, 2.9926164969191991e-3, 5.0907157464617419e-4, 6.4657046781554344e-5, 6.7471655896825140e-6, 6.9187703539306554e-7, 8.2014073897371343e-8], [-2.7182918451760235e-3, -3.0977230092054810e-3, -2.7185534581928360e-3, -1.5786643788152860e-3, -6.0285365713460416e-4, -1.5602229178109651e-4, -2.8846863203220700e-5, -4.1862488437458581e-6, -5.6027474889102295e-7, -7.8603561409366607e-8], [3.7121102261458187e-5, 7.9204301243062193e-5, 1.0609098496400741e-4, 8.5643265864245358e-5, 4.4355882018489486e-5, 1.5455523656688422e-5, 3.8243859827228809e-6, 7.3281609170768815e-7, 1.2509881095531045e-7, 2.0729130133942369e-8], [-5.3780495710653383e-7, -1.9190343925555924e-6, -3.5620408169864916e-6, -3.8380517586671323e-6, -2.6089100574776446e-6, -1.1808544620122949e-6, -3.7686624751865862e-7, -9.2164771990773529e-8, -1.9538389054325419e-8, -3.7641463323485563e-9], [7.9610801056635484e-9, 4.3651358164064053e-8, 1.0886577083133985e-7, 1.5244661417154284e-7, 1.3217477759080079e-7, 7.5548387091392893e-8, 3.0255838505280412e-8, 9.1991266036186526e-9, 2.3664302419626642e-9, 5.2167586982939919e-10], [-1.1925933889379555e-10, -9.4547441738791492e-10, -3.0988124064229626e-9, -5.5161662709781735e-9, -5.9720197139193950e-9, -4.2214950581630272e-9, -2.0773249032569105e-9, -7.6888672720104575e-10, -2.3534981498177695e-10, -5.8522974269294512e-11], [1.7571977926667452e-12, 1.9695461528200736e-11, 8.3269123734546942e-11, 1.8508255795488994e-10, 2.4600708308907072e-10, 2.1146852361751264e-10, 1.2567873057726799e-10, 5.5642859014281839e-11, 1.9928054148728933e-11, 5.5196840255221486e-12], [-2.6389472859162545e-14, -3.9701488189182718e-13, -2.1301147650327378e-12, -5.8269735861762116e-12, -9.3765120208540600e-12, -9.6641385101761849e-12, -6.8363784407045780e-12, -3.5663400838889771e-12, -1.4728105922649738e-12, -4.4941051001399550e-13], [3.7251476094994678e-16, 7.7792929458714077e-15, 5.2243846405038170e-14, 1.7365036263878440e-13, 3.3420421133246359e-13, 4.0799336688391315e-13, 3.3920346854557810e-13, 2.0577316486602844e-13, 9.6743510609313338e-14, 3.2207740019159770e-14], [-5.5708552564934994e-18, -1.4857053050165275e-16, -1.2338135314068258e-15, -4.9296826400752774e-15, -1.1227688978919383e-14, -1.6061092608521798e-14, -1.5518685651377272e-14, -1.0820415275963946e-14, -5.7261304964131853e-15, -2.0622247090914396e-15], [8.6254879099087342e-20, 2.7745964551693715e-18, 2.8173300142696900e-17, 1.3398791028799631e-16, 3.5771449551548346e-16, 5.9383875448544339e-16, 6.6015449649032690e-16, 5.2353486581240927e-16, 3.0871057483900417e-16, 1.1936672783235484e-16], [-6.6684530894448631e-22, -5.0752736311445208e-20, -6.2431170079384267e-19, -3.5008906886751006e-18, -1.0860850920690890e-17, -2.0740877789692747e-17, -2.6286172641977286e-17, -2.3486626265460361e-17, -1.5292107461431293e-17, -6.3058378116981495e-18], [2.8895689615986802e-23, 9.0870821711420239e-22, 1.3430425046233839e-20, 8.8198312863262712e-20, 3.1548172732604501e-19, 6.8750162620263144e-19, 9.8504584113942563e-19, 9.8308153755400592e-19, 7.0099216015339884e-19, 3.0643222749485367e-19], [-1.1943506242506411e-25, -1.6061965421289624e-23, -2.8183676872112146e-22, -2.1475904767963774e-21, -8.7899299273985143e-21, -2.1692150726269728e-20, -3.4859457695783810e-20, -3.8544217662894735e-20, -2.9870373801248973e-20, -1.3766435266728998e-20]],
        [[1.0452723127317339e-1, 7.0798652332248554e-2, 3.2403119524234823e-2, 9.9819015755833025e-3, 2.0630980600569170e-3, 2.8697662149764784e-4, 2.7481256328757033e-5, 1.9498844298473811e-6, 1.2350319475552750e-7, 9.3475901938011580e-9], [-2.4451397948516096e-3, -2.5456162499412572e-3, -2.0152852790935467e-3, -1.0433316621325441e-3, -3.4464499438269034e-4, -7.3503689526835092e-5, -1.0456540928058581e-5, -1.0695119514726744e-6, -9.3086076443840159e-8, -8.7682865989351526e-9], [3.1359784878332406e-5, 5.9816366156971898e-5, 7.2055884274393227e-5, 5.1234314578376992e-5, 2.2634999255238692e-5, 6.4452435161424923e-6, 1.2301720781741882e-6, 1.6918442350377751e-7, 1.9480789409975811e-8, 2.2631764606559438e-9], [-4.2744692499239081e-7, -1.3495357233340960e-6, -2.2247540171975875e-6, -2.0861087943122018e-6, -1.2003350638937032e-6, -4.4274807498265044e-7, -1.0945693959014590e-7, -1.9512463469006869e-8, -2.8761969583770221e-9, -4.0309764823478928e-10], [5.9440280626509272e-9, 2.8695236284679808e-8, 6.2869755911977642e-8, 7.5990961038917021e-8, 5.5468053865015102e-8, 2.5790567822223968e-8, 8.0352784496057396e-9, 1.8058846532075695e-9, 3.3170398837755170e-10, 5.4917285752203480e-11], [-8.4768930936712599e-11, -5.8232220361292234e-10, -1.6615716785778603e-9, -2.5374142269295409e-9, -2.3036564828465978e-9, -1.3238898132046292e-9, -5.0925413397854917e-10, -1.4118173341678123e-10, -3.1601236768980762e-11, -6.0680239965874934e-12], [1.1595594197099066e-12, 1.1390832566889328e-11, 4.1641067271096456e-11, 7.8979934180132792e-11, 8.7771635673246064e-11, 6.1358771252248913e-11, 2.8656470945892859e-11, 9.6244638810091623e-12, 2.5760808808556931e-12, 5.6464681715965831e-13], [-1.7046202445919872e-14, -2.1594006812867413e-13, -9.9568579739018536e-13, -2.3155627393543150e-12, -3.1098114386776633e-12, -2.6096669403200486e-12, -1.4589859054043693e-12, -5.8454274281265301e-13, -1.8406688683587029e-13, -4.5422556512824440e-14], [2.3046071844793945e-16, 3.9884295507729002e-15, 2.2898410133342139e-14, 6.4495456880181519e-14, 1.0348500571935456e-13, 1.0304820887195073e-13, 6.8121104726193238e-14, 3.2122306070724707e-14, 1.1731241945265045e-14, 3.2202480091148382e-15], [-2.3367772338851270e-18, -7.1889217687379581e-17, -5.0870104245199807e-16, -1.7167980618919454e-15, -3.2582096892451093e-15, -3.8108678512435218e-15, -2.9464691636877372e-15, -1.6158121948800563e-15, -6.7580002748424915e-16, -2.0418634488473174e-16], [8.3181882224386271e-20, 1.2657055790120605e-18, 1.0907686461747996e-17, 4.3845713220636279e-17, 9.7604633568811433e-17, 1.3287868212676464e-16, 1.1898977912846809e-16, 7.5074291260608844e-17, 3.5555498895140311e-17, 1.1714797842406577e-17], [3.6369968038499740e-22, -2.2043437245842627e-20, -2.2890239679138988e-19, -1.0800888785110346e-18, -2.7950983183315835e-18, -4.3920267043556563e-18, -4.5144992302306961e-18, -3.2452080736031387e-18, -1.7228086468577144e-18, -6.1390704925547409e-19], [7.4723496914079964e-24, 3.7141570165950236e-22, 4.6473661582328917e-21, 2.5697584042325779e-20, 7.6786764818256254e-20, 1.3820811226947328e-19, 1.6173372491735235e-19, 1.3128201779629984e-19, 7.7408739934801617e-20, 2.9614656796941284e-20], [-8.7145452930323671e-25, -6.1722373026288832e-24, -9.1818340027811008e-23, -5.9198540308310065e-22, -2.0286174694143773e-21, -4.1521589897673752e-21, -5.4887380411853067e-21, -4.9886246420679694e-21, -3.2391645549128371e-21, -1.3215451062179390e-21]],
        [[9.9872649025119119e-2, 6.6139649532348496e-2, 2.8875058199295670e-2, 8.2382519638764471e-3, 1.5180095316053392e-3, 1.7859767098242409e-4, 1.3402190233091191e-5, 6.6658264736300187e-7, 2.5740291967879641e-8, 1.1397387848713822e-9], [-2.2132819651082002e-3, -2.1248558069607729e-3, -1.5307403118174476e-3, -7.1620320119816132e-4, -2.0897549386698128e-4, -3.7771922836234150e-5, -4.2692971824133709e-6, -3.1552379345173996e-7, -1.7652185064758552e-8, -1.0371647855594363e-9], [2.6749589937529440e-5, 4.6035409414378338e-5, 5.0450853661266760e-5, 3.2103540606022185e-5, 1.2338987575736458e-5, 2.9388940005608558e-6, 4.4352207975436091e-7, 4.4523630944874709e-8, 3.4064490309205280e-9, 2.5999056459374816e-10], [-3.4454149022537991e-7, -9.7055366012953082e-7, -1.4385692736477527e-6, -1.1917266472917810e-6, -5.9101396628491280e-7, -1.8137506906848251e-7, -3.5458084373848895e-8, -4.6608547493712965e-9, -4.6930837646011366e-10, -4.5131399215154013e-11], [4.4923460718477834e-9, 1.9358364332546416e-8, 3.7739662590283231e-8, 3.9946793687515463e-8, 2.4962977195786039e-8, 9.6166591629814682e-9, 2.3705344298900524e-9, 3.9655946997351588e-10, 5.0986197311955806e-11, 6.0123034855600238e-12], [-6.1887674835114057e-11, -3.6915968509110882e-10, -9.2827079827709894e-10, -1.2336720278518730e-9, -9.5422092391566524e-10, -4.5317701900620189e-10, -1.3815050246649283e-10, -2.8779550030403834e-11, -4.6107467432379004e-12, -6.5142856746018114e-13], [7.7762257935529796e-13, 6.8023044479464767e-12, 2.1770227378927322e-11, 3.5711993008434890e-11, 3.3667316006901887e-11, 1.9416867972875996e-11, 7.2041166106072781e-12, 1.8355772912541808e-12, 3.5900276477635779e-13, 5.9581633513745761e-14], [-1.0345622427879471e-14, -1.2157119786537228e-13, -4.8810842368595826e-13, -9.7709463823344418e-13, -1.1097849093652111e-12, -7.6777671624631598e-13, -3.4207875106801398e-13, -1.0498582109457212e-13, -2.4628730301001131e-14, -4.7204948171232110e-15], [2.0957778903434131e-16, 2.1185466011784621e-15, 1.0504190579355313e-14, 2.5449650661747303e-14, 3.4489423135957734e-14, 2.8321690147493952e-14, 1.4977375884682798e-14, 5.4631657548351326e-15, 1.5137318248981672e-15, 3.3015386734013176e-16], [1.2098268208552976e-18, -3.6364779304484151e-17, -2.2201263739378256e-16, -6.3735135499721755e-16, -1.0182912027545376e-15, -9.8264149550024107e-16, -6.1037154937355121e-16, -2.6147704283186421e-16, -8.4410861110083565e-17, -2.0681721930101406e-17], [8.5634297202826591e-20, 5.9753967921212079e-19, 4.4356652871093418e-18, 1.5286843750774678e-17, 2.8677624558933528e-17, 3.2263579166633568e-17, 2.3321426005564870e-17, 1.1608185615659155e-17, 4.3129802206269184e-18, 1.1737091259267145e-18], [-8.4591454218520038e-22, -9.9416853043639612e-21, -8.7971015785783671e-20, -3.5521752473221242e-19, -7.7445985999196808e-19, -1.0075803351377363e-18, -8.4030058430680514e-19, -4.8124211485227959e-19, -2.0353167567372323e-19, -6.0905059596728297e-20], [-6.6290684672224532e-23, 1.6552327853990671e-22, 1.7389084027876800e-21, 8.0156805509799672e-21, 2.0122500032463985e-20, 3.0050045038779000e-20, 2.8686358616683623e-20, 1.8733522938186916e-20, 8.9287702702999018e-21, 2.9119308499625246e-21], [-1.7944168580311629e-24, -2.3335108209821911e-24, -3.1017385008246915e-23, -1.7404120413322666e-22, -5.0368295853886126e-22, -8.5805585944286151e-22, -9.3061345669311403e-22, -6.8710017383984788e-22, -3.6561110560500933e-22, -1.2889541227178017e-22]],
        [[9.5647793642428607e-2, 6.2224720160940489e-2, 2.6168938240345860e-2, 7.0239878381424646e-3, 1.1803010078198127e-3, 1.2115025942219028e-4, 7.4115851143444598e-6, 2.6936128426138827e-7, 6.4104375872810382e-9, 1.5224256365799503e-10], [-2.0146892314108373e-3, -1.7984023612993943e-3, -1.1871667437087913e-3, -5.0732514529014316e-4, -1.3305216089293755e-4, -2.0905404084377112e-5, -1.9402320641819888e-6, -1.0721310086113194e-7, -3.8868306541587235e-9, -1.3257031885886408e-10], [2.3008561353126241e-5, 3.6029394652078111e-5, 3.6279092397211921e-5, 2.0952387408548158e-5, 7.1314129528605009e-6, 1.4522119250037567e-6, 1.7783235283752343e-7, 1.3354613462403750e-8, 6.7912017906687564e-10, 3.1913582705489024e-11], [-2.8163609207481711e-7, -7.1204873329897933e-7, -9.5891693543645318e-7, -7.1127867442896005e-7, -3.0906825765182330e-7, -8.0509528694982833e-8, -1.2730198985267549e-8, -1.2575671300950875e-9, -8.6067003200736767e-11, -5.3506790075016283e-12], [3.4219222229622316e-9, 1.3366997814640739e-8, 2.3460960889623382e-8, 2.2027064925294584e-8, 1.1966819185086059e-8, 3.8890849616170517e-9, 7.7316684623593979e-10, 9.7636824338943259e-11, 8.7052734072179998e-12, 6.9191514337054793e-13], [-4.5882181076646045e-11, -2.4015517972262921e-10, -5.3813070496656510e-10, -6.3049215140678041e-10, -4.2172021589776154e-10, -1.6827291027206302e-10, -4.1325652956448628e-11, -6.5339505474358227e-12, -7.3979140722622052e-13, -7.3070855119098550e-14], [5.9234241300220107e-13, 4.1791670778123320e-12, 1.1814166314702188e-11, 1.6998186346685641e-11, 1.3795724035196287e-11, 6.6644397403433115e-12, 1.9918379124937699e-12, 3.8752189919217451e-13, 5.4540446418811600e-14, 6.5360735236102271e-15], [-2.4232917685431377e-15, -7.0841916255710466e-14, -2.5191369055311698e-13, -4.3671732380310305e-13, -4.2407384987396960e-13, -2.4499130436440332e-13, -8.7981210781002503e-14, -2.0753881203820834e-14, -3.5649526915270947e-15, -5.0783861920976144e-16], [2.9492851961076380e-16, 1.1527865129435551e-15, 4.9605437561973762e-15, 1.0579386165338012e-14, 1.2299635620396819e-14, 8.4356344414345495e-15, 3.6024731763033085e-15, 1.0172103265799921e-15, 2.0986149040095032e-16, 3.4913502164790956e-17], [2.6384361683727383e-18, -1.9234380216937205e-17, -1.0214590935696064e-16, -2.5106451474706170e-16, -3.4114485515933457e-16, -2.7444237784002268e-16, -1.3795148854071218e-16, -4.6090405721729680e-17, -1.1259094759597561e-17, -2.1540091124606924e-18], [-5.1914815041425068e-20, 3.0053190580808854e-19, 1.9548722517796065e-18, 5.6877990706028216e-18, 9.0417231324917204e-18, 8.4781483122891086e-18, 4.9733712656754196e-18, 1.9457763541949741e-18, 5.5563277262997432e-19, 1.2059281748848160e-19], [-5.9519812070896102e-21, -4.1861523433656582e-21, -3.2670882073814888e-20, -1.2256880302430658e-19, -2.2981417354472772e-19, -2.4985325067302231e-19, -1.6970879837072100e-19, -7.7013649851905583e-20, -2.5410611337913042e-20, -6.1819613131909088e-21], [-1.3107921883100540e-22, 8.5045752536692728e-23, 7.2854835811856166e-22, 2.6823438082308577e-21, 5.6615898538419094e-21, 7.0555759611045771e-21, 5.5054904392476649e-21, 2.8723947444017931e-21, 1.0835162308697055e-21, 2.9234262303684169e-22], [4.3595073767662596e-26, -1.0724480471744513e-24, -1.1742600245935271e-23, -5.4756294980780759e-23, -1.3418467011941515e-22, -1.9122596252032293e-22, -1.7025689952295340e-22, -1.0127276613214992e-22, -4.3240143944777469e-23, -1.2813089522116443e-23]],
        [[9.1792395673181597e-2, 5.8891438996495182e-2, 2.4052420427858437e-2, 6.1536050895231091e-3, 9.6144153257361069e-4, 8.8505505273523484e-5, 4.5856323334138759e-6, 1.2778117564410162e-7, 1.9430095143484209e-9, 2.3032467759385025e-11], [-1.8432732661960187e-3, -1.5410424196780661e-3, -9.3730923721291622e-4, -3.6868857538028461e-4, -8.8122529090237691e-5, -1.2303344931767700e-5, -9.6763763731904380e-7, -4.1597892684530917e-8, -1.0057169374620803e-9, -1.8778995973018893e-11], [1.9929637704937208e-5, 2.8625513463685728e-5, 2.6713217077508912e-5, 1.4177408211065219e-5, 4.3419673742650471e-6, 7.7127294546976938e-7, 7.8602570233339205e-8, 4.5466530800535338e-9, 1.5619532059644944e-10, 4.2712365715260295e-12], [-2.3345708427824367e-7, -5.3175882451270885e-7, -6.5635100623262694e-7, -4.4112140449290737e-7, -1.7044597364230816e-7, -3.8398464301872406e-8, -5.0251724466767046e-9, -3.8230039431660275e-10, -1.7943785060990309e-11, -6.8299835344277742e-13], [2.6467299845128935e-9, 9.4253299934751909e-9, 1.5042461251735869e-8, 1.2673563570520774e-8, 6.0710240570197898e-9, 1.6934374451453506e-9, 2.7704615928829380e-10, 2.6930189533538701e-11, 1.6695251259874806e-12, 8.4875694599264881e-14], [-3.1354948008752010e-11, -1.6005414877142235e-10, -3.2421404787298795e-10, -3.3802379864053659e-10, -1.9790251910622644e-10, -6.7369311257027683e-11, -1.3564067233306379e-11, -1.6529175298698122e-12, -1.3195783874000699e-13, -8.6654714951566259e-15], [6.6455244339726555e-13, 2.6227193279346313e-12, 6.5240803671066819e-12, 8.4124561427175466e-12, 5.9885179031069052e-12, 2.4647737735131297e-12, 6.0316432496814729e-13, 9.0693872762715390e-14, 9.1280435662200239e-15, 7.5293933536877625e-16], [7.5166089871282747e-15, -4.3007911289546883e-14, -1.3919737686231698e-13, -2.0751723659113446e-13, -1.7302597266560882e-13, -8.4402550765604298e-14, -2.4749270752433313e-14, -4.5262027683849630e-15, -5.6387834101663926e-16, -5.7049100872460055e-17], [2.7388167738630807e-16, 6.4186090318459601e-16, 2.4236816291608698e-15, 4.6188504945409659e-15, 4.6703202245294409e-15, 2.7104933701792833e-15, 9.4582914749862285e-16, 2.0797443933898058e-16, 3.1562582832611082e-17, 3.8369050594434271e-18], [-6.3094595885189917e-18, -9.8886091279863823e-18, -4.4335146887408814e-17, -1.0179352245604245e-16, -1.2133620961801823e-16, -8.2631346550178367e-17, -3.3965212626403445e-17, -8.8810611542094376e-18, -1.6184662267057004e-18, -2.3219372609795718e-19], [-4.2445758642381247e-19, 1.8695003750479459e-19, 1.0998671796361593e-18, 2.3439745620471899e-18, 3.0675203628133997e-18, 2.4051215329240591e-18, 1.1531841477529617e-18, 3.5498836560670332e-19, 7.6682380282823001e-20, 1.2779258240901622e-20], [-9.5936684541435606e-21, -1.4245741349868683e-21, -1.0026082959800062e-20, -4.3204770483699002e-20, -7.2468124985580165e-20, -6.6741104979021628e-20, -3.7181471061246923e-20, -1.3357857089048040e-20, -3.3801053369183762e-21, -6.4522269152745184e-22], [5.1055852841743264e-23, 2.7740331062121859e-23, 2.3645572402062265e-22, 9.1274885414339241e-22, 1.6953862105953910e-21, 1.7840039836428853e-21, 1.1437401440381204e-21, 4.7541672235409032e-22, 1.3939699571193854e-22, 3.0100415794438222e-23], [8.4380769023216514e-24, -1.3241910296648061e-24, -9.1755212131167389e-24, -2.0574532644527038e-23, -3.8693469752829420e-23, -4.5912528964298096e-23, -3.3641934986347081e-23, -1.6049938406762785e-23, -5.3971052764345954e-24, -1.3033011773918487e-24]],
        [[8.8256895425690455e-2, 5.6019813567422888e-2, 2.2369160791229841e-2, 5.5150187731244732e-3, 8.1445021605206734e-4, 6.8878577922429824e-5, 3.1304520822988734e-6, 7.0325514300399846e-8, 7.2391731665497713e-10, 4.1276072926871767e-12], [-1.6943638091402746e-3, -1.3352219846937143e-3, -7.5146032832285087e-4, -2.7344717437879557e-4, -6.0174056419326771e-5, -7.6005705404179937e-6, -5.2113819127986861e-7, -1.8163843442067517e-8, -3.0678660767897090e-10, -3.0433670252741220e-12], [1.7364581516324372e-5, 2.3053655462973414e-5, 2.0091381002203931e-5, 9.9082943272663295e-6, 2.7702464256911715e-6, 4.3717231897540837e-7, 3.7970482246809058e-8, 1.7446782070070116e-9, 4.1712085227477556e-11, 6.3930725476875355e-13], [-1.9517423253735292e-7, -4.0351358884791020e-7, -4.6022201425222460e-7, -2.8317109185340257e-7, -9.8552785842150579e-8, -1.9525319221519025e-8, -2.1621112611889612e-9, -1.3018495265672218e-10, -4.2835377698323764e-12, -9.5842821285949288e-14], [2.1999117089177480e-9, 6.7669359610703254e-9, 9.8483401949030954e-9, 7.5354717286396455e-9, 3.2305996719132362e-9, 7.8719060590288081e-10, 1.0822170223319600e-10, 8.2887795003791246e-12, 3.6253512616054913e-13, 1.1293187967778769e-14], [-1.2235314046290125e-11, -1.0951866798730252e-10, -2.0683233370053149e-10, -1.9196788922274200e-10, -9.8748087480329944e-11, -2.8976359169306213e-11, -4.8597668344673057e-12, -4.6496129372530075e-13, -2.6389925519532055e-14, -1.1026706538220150e-15], [9.3597415723718468e-13, 1.6621826471714440e-12, 3.5286263717455652e-12, 4.2309671603092728e-12, 2.7180920633177175e-12, 9.7386498539618197e-13, 1.9888341200044697e-13, 2.3503680754847188e-14, 1.6977220297731484e-15, 9.2246478881246781e-17], [8.6673659452593036e-15, -2.6831029741710259e-14, -7.9422806472409143e-14, -1.0333970270838027e-13, -7.4836658746896244e-14, -3.1218073670500589e-14, -7.5826799726057383e-15, -1.0891238110077451e-15, -9.8327044402261516e-17, -6.7655669385799520e-18], [-3.3917701247354469e-16, 4.0694694420965279e-16, 1.5301218298023766e-15, 2.2760666220941368e-15, 1.9166328905178653e-15, 9.3881168330436022e-16, 2.7030733695912350e-16, 4.6739948921355972e-17, 5.1949779797881625e-18, 4.4237853613455120e-19], [-2.8902586075748888e-17, -3.5472298243011154e-18, -7.6865980295014816e-18, -3.6519355429025401e-17, -4.4224356615705158e-17, -2.6551259529973833e-17, -9.0784148742624601e-18, -1.8737848508032077e-18, -2.5289962289902663e-19, -2.6120368072517856e-20], [-5.7083762077432586e-19, 1.2569963758267026e-19, 7.1931287760419850e-19, 1.0822666076699954e-18, 1.1248928529902217e-18, 7.3534062918877841e-19, 2.9026917938091336e-19, 7.0660196334125903e-20, 1.1432818754357947e-20, 1.4068504354723045e-21], [9.4246824390212292e-21, -2.0522454394002936e-21, -1.2049807949474085e-20, -2.0600373930598460e-20, -2.5221712804163708e-20, -1.9226970086767997e-20, -8.8275515633953693e-21, -2.5184386879859570e-21, -4.8295373397406838e-22, -6.9687739465301363e-23], [8.5816065073778414e-22, -5.7919334781035961e-23, -3.6175048536888019e-22, 9.2319283796960431e-23, 4.8805726143251194e-22, 4.7915456070625328e-22, 2.5677393627428103e-22, 8.5220401581843761e-23, 1.9161645181255221e-23, 3.1963077399414519e-24], [2.0838627375117412e-23, -1.6805659729125358e-24, -1.3254295574858252e-23, -1.2685914719392587e-23, -1.3047796247200729e-23, -1.1970645911351439e-23, -7.1845225792311208e-24, -2.7452835802840025e-24, -7.1626737450720339e-25, -1.3631912877685313e-25]],
        [[8.5000083125443585e-2, 5.3519662997096252e-2, 2.1011183158563123e-2, 5.0379046658848910e-3, 7.1305301352314744e-4, 5.6559384261725263e-5, 2.3265669935277133e-6, 4.4233822026444899e-8, 3.3129842299818780e-10, 9.2622200220365700e-13], [-1.5642275390982208e-3, -1.1684743379741067e-3, -6.1042903470286753e-4, -2.0598365918183015e-4, -4.1994052893471178e-5, -4.8633463687894136e-6, -2.9771962464451202e-7, -8.7497776018275986e-9, -1.0939226831405945e-10, -5.8460369537012895e-13], [1.5229703325263573e-5, 1.8795220101667004e-5, 1.5390723072074817e-5, 7.1224589996314296e-6, 1.8423758642548051e-6, 2.6274177580582541e-7, 1.9885065633443818e-8, 7.4815345735705211e-10, 1.2937609964844024e-11, 1.1017709379133046e-13], [-1.6066593602568011e-7, -3.1082828332510077e-7, -3.3179855144187556e-7, -1.8864991776606158e-7, -5.9722423618214464e-8, -1.0542287616611905e-8, -1.0065919261155588e-9, -4.9279141098146266e-11, -1.1729383522808284e-12, -1.5148056113826739e-14], [2.1886142458334936e-9, 4.9218471750291344e-9, 6.4065630316845133e-9, 4.5154990135425981e-9, 1.7688023192382775e-9, 3.8501095318459622e-10, 4.5571941586339592e-11, 2.8262219451467620e-12, 8.9445686531744142e-14, 1.6638891653745638e-15], [1.0830505176615130e-11, -7.7258725980736358e-11, -1.4338828220909647e-10, -1.1787637211719858e-10, -5.2936451592358172e-11, -1.3412998292778718e-11, -1.8942517192824283e-12, -1.4491913448023465e-13, -5.9476703921992341e-15, -1.5325851407699553e-16], [8.4776579084611833e-13, 1.0796377835337205e-12, 1.9803646276845284e-12, 2.2087957582124349e-12, 1.2929719699239262e-12, 4.0919939226376965e-13, 7.0982221921151967e-14, 6.7221563021537763e-15, 3.5298059420807708e-16, 1.2205742110284510e-17], [-2.1559925286724050e-14, -1.5117333274054016e-14, -3.0767391328642103e-14, -4.4967052597680335e-14, -3.2136856719828596e-14, -1.2118227306825568e-14, -2.5081080664774856e-15, -2.8842553006188510e-16, -1.9027768147352497e-17, -8.5841402707080914e-19], [-1.5551460896206394e-15, 3.3880419275134393e-16, 1.5810705135919196e-15, 1.5188168311128479e-15, 9.1478372111460682e-16, 3.5686007300898870e-16, 8.4144376072698855e-17, 1.1542877772871421e-17, 9.4245994386072259e-19, 5.4137185924269747e-20], [-2.8069981271892184e-17, -1.3572307354761162e-18, 3.3119465348886712e-18, -1.2044577438438022e-17, -1.6504952747079299e-17, -9.0322933412653660e-18, -2.6205590859230139e-18, -4.3268695198988091e-19, -4.3273226787251895e-20, -3.0978742487659940e-21], [1.0397252077406513e-18, -4.3198995939302995e-20, -3.7794455730593200e-19, 8.8983185265074219e-20, 3.4468758684264518e-19, 2.3178722816235626e-19, 7.8713068165469841e-20, 1.5351310623357093e-20, 1.8552992902574937e-21, 1.6234378793343718e-22], [6.5681008418990402e-20, -5.5191907712337531e-21, -3.9309815425446819e-20, -2.6964886728249571e-20, -1.3290848031941843e-20, -6.3614821220613413e-21, -2.2858743276640890e-21, -5.1716760489123243e-22, -7.4680554932760365e-23, -7.8503122912116046e-24], [9.6832013055749478e-22, -3.5565642788678760e-23, -4.7848036359383222e-22, -1.7614384816484713e-22, 1.0604835016726390e-22, 1.3134853009538380e-22, 6.1807035451512884e-23, 1.6565263796290200e-23, 2.8352042548094596e-24, 3.5248286575220391e-25], [-4.1134934233487027e-23, 4.2468964682962249e-24, 2.2097981581855457e-23, 9.0913445124785078e-24, -1.4384735387951297e-24, -3.0686545073198727e-24, -1.6467690779839223e-24, -5.0800565992819636e-25, -1.0181092967727606e-25, -1.4752306581994523e-26]],
        [[8.1987795074943568e-2, 5.1322137565693312e-2, 1.9901938843000808e-2, 4.6765079048021088e-3, 6.4182713441743930e-4, 4.8596384636949442e-5, 1.8591273262744076e-6, 3.1273373676409976e-8, 1.8411033184818515e-10, 2.7554455164598444e-13], [-1.4494843892939993e-3, -1.0318025065149926e-3, -5.0168920458417190e-4, -1.5699316907004219e-4, -2.9711416803788904e-5, -3.1801301864018927e-6, -1.7693747365776828e-7, -4.5356590228111289e-9, -4.4615034387479800e-11, -1.3705849095013974e-13], [1.3521725599700207e-5, 1.5491005813429221e-5, 1.1937346286284632e-5, 5.2227360244041397e-6, 1.2653287127950104e-6, 1.6580461163715995e-7, 1.1176359468270449e-8, 3.5484177632844111e-10, 4.6352730559227977e-12, 2.2498843544323503e-14], [-1.2312412972888442e-7, -2.4315494151903952e-7, -2.4984362715623467e-7, -1.3271651612156760e-7, -3.8458124483345953e-8, -6.0900608001708593e-9, -5.0729956049284034e-10, -2.0625850573840145e-11, -3.6740684985899809e-13, -2.7643588833573866e-15], [2.5282883124874772e-9, 3.6075582744839020e-9, 3.9736567739644652e-9, 2.6126813585762589e-9, 9.6252598552093610e-10, 1.9306328667999949e-10, 2.0302658506575102e-11, 1.0541525756438385e-12, 2.5013622593995620e-14, 2.7749886884379722e-16], [1.7811108920183999e-11, -5.5270505533696732e-11, -1.0056204821902636e-10, -7.4916817470305142e-11, -2.9875767035287399e-11, -6.6217862523900012e-12, -7.9864100253826930e-13, -4.9805058420637586e-14, -1.5128386991451110e-15, -2.3728978775592986e-17], [-5.1254660204537144e-13, 7.9569878579616450e-13, 1.8038240030768054e-12, 1.5561942333711265e-12, 7.2644124162989517e-13, 1.9093237230394162e-13, 2.7674465255803319e-14, 2.1181916089776019e-15, 8.2266799668044978e-17, 1.7749263187123933e-18], [-7.3479875543285523e-14, -5.8519624415453992e-15, 1.5292492729632580e-14, -4.9613677333406789e-15, -1.0758406226487981e-14, -4.5663309717557788e-15, -8.7192470570610771e-16, -8.3351686643818567e-17, -4.0991954830936147e-18, -1.1834447239697454e-19], [-1.0879303306192052e-15, 2.0392846234881337e-16, 9.9972925378888492e-16, 8.6446255489277783e-16, 4.4289782890575804e-16, 1.4491438358300867e-16, 2.8407268434717626e-17, 3.1286099427239651e-18, 1.8939687053508697e-19, 7.1294266652421369e-21], [7.1617151113334161e-17, -7.2805357592376653e-18, -4.5880540761732033e-17, -3.1184324833432935e-17, -1.2638803581217325e-17, -3.9012894414782384e-18, -8.4281635767338063e-19, -1.0959816845523693e-19, -8.1527847153050041e-21, -3.9209059296587970e-22], [3.4967400168549810e-18, -2.0134955789319716e-19, -1.8203861908230065e-18, -8.9267596875226509e-19, -8.8223533637145447e-20, 5.4741704524486855e-20, 2.1777286974449626e-20, 3.6118788931710129e-21, 3.2948325558428668e-22, 1.9849476497257077e-23], [-5.7678619397834106e-22, 1.7270935933135772e-21, -8.2690842662052217e-22, -4.3016574006187281e-21, -4.1191410658840258e-21, -2.1050875347929552e-21, -6.4168768707792806e-22, -1.1593614361427304e-22, -1.2580498103625456e-23, -9.3122619766282631e-25], [-4.6730833760540117e-21, 3.6671147623847721e-22, 2.5986239661130850e-21, 1.4432409488192195e-21, 3.7776881408417983e-22, 7.5475977158046535e-23, 1.7652602834024222e-23, 3.5198487614001146e-24, 4.5454465907884178e-25, 4.0711914647182012e-26], [-1.3304121417181997e-22, 6.4232168227178047e-24, 7.2359641121524655e-23, 4.1223664024446465e-23, 9.1699474765516633e-24, 2.7787241717778927e-25, -3.4161857208713384e-25, -1.0032445298741418e-25, -1.5592025987255936e-26, -1.6642680768203016e-27]],
        [[7.9192819716909019e-2, 4.9373862083669504e-2, 1.8985237500267762e-2, 4.3996950611038376e-3, 5.9122401577652398e-4, 4.3362478833033503e-5, 1.5786101171334361e-6, 2.4418812813533131e-8, 1.2163262189686692e-10, 1.1279390219871839e-13], [-1.3465137444315108e-3, -9.1864214633286884e-4, -4.1723876146717370e-4, -1.2097177324973455e-4, -2.1212637753160461e-5, -2.1021334662156057e-6, -1.0736892731573177e-7, -2.4612442504782786e-9, -2.0120744618758694e-11, -3.9468158073064122e-14], [1.2294545017199784e-5, 1.2886226581041206e-5, 9.2624444765454279e-6, 3.8380561278317595e-6, 8.7936142337400943e-7, 1.0759461171648009e-7, 6.6087001212557746e-9, 1.8284265549286125e-10, 1.8936433032042173e-12, 5.5611014676579981e-15], [-8.1220983273148183e-8, -1.9328572022985511e-7, -1.9981642250643492e-7, -1.0087762637388231e-7, -2.6969807503151264e-8, -3.8471432771947842e-9, -2.8091395920943474e-10, -9.5946181808595687e-12, -1.3142388050849854e-13, -5.9493418905485753e-16], [2.5878918438407030e-9, 2.6824541627105433e-9, 2.4405232658936682e-9, 1.4874812762478189e-9, 5.2135184209431881e-10, 9.8296450073130478e-11, 9.4242940806227753e-12, 4.2334259146494764e-13, 7.8542412446885855e-15, 5.3402935384764475e-17], [-1.9851467367352966e-11, -3.7690560293885931e-11, -5.0500568277460433e-11, -3.7375950696108085e-11, -1.4901282424010725e-11, -3.1676272571425109e-12, -3.4784787079835913e-13, -1.8511666937323417e-14, -4.3227173590705975e-16, -4.1717917537351634e-18], [-2.5003112789219266e-12, 6.7520471407362614e-13, 2.3435528590069497e-12, 1.5915572771571418e-12, 5.5012810076723085e-13, 1.0916877341359587e-13, 1.2368647537302312e-14, 7.4576251607122975e-16, 2.1561965025092217e-17, 2.8882844208195437e-19], [-4.4770718828694714e-14, -4.5957622659859670e-15, 9.3192993760345937e-15, -1.0692643669656182e-15, -4.5273414940678982e-15, -1.8691166594508239e-15, -3.2262758546013455e-16, -2.6094585948255029e-17, -9.8165144065445594e-19, -1.8018824536648091e-20], [3.2816346598742150e-15, -1.3503563312401093e-16, -1.5730086632017043e-15, -7.2213650764047189e-16, -6.1566794401290714e-17, 3.1559574170755631e-17, 8.8445217515355504e-18, 9.0017125605189934e-19, 4.2123768480173993e-20, 1.0256936440511628e-21], [1.3106050659012101e-16, -8.4672907143464687e-18, -7.5254570791446635e-17, -4.5690474548705954e-17, -1.3355014024355297e-17, -2.4678497968535918e-18, -3.3526358267987188e-19, -3.1337351288946288e-20, -1.7038352860342229e-21, -5.3698556005533386e-23], [-2.4643476965563521e-18, 2.4864526727883883e-19, 1.4188540644750308e-18, 7.8667289242951622e-19, 2.1450433679740879e-19, 4.2984805778892318e-20, 7.6229194747634988e-21, 9.3439505860828863e-22, 6.4226915256305837e-23, 2.6032803260675012e-24], [-2.4550369216382111e-19, 1.4909361302732643e-20, 1.3393421236367733e-19, 7.4251789745583276e-20, 1.6660195347320019e-20, 1.3361725181536949e-21, -8.5258711538207623e-23, -2.6055901552826175e-23, -2.3060629801182378e-24, -1.1761945676088465e-25], [-1.1182483110559555e-21, -1.1482116490217201e-22, 5.9167383355868142e-22, 4.9201112396022331e-22, 1.8255858706155825e-22, 3.9768652565223199e-23, 6.4578142662569780e-24, 8.5892599984185154e-25, 7.9864159023200086e-26, 4.9753322076083369e-27], [3.4553437907642152e-22, -2.4908757906184381e-23, -1.9036875126326109e-22, -1.0439180952065386e-22, -2.4253765337202994e-23, -2.7951521476612859e-24, -2.2024955928560390e-25, -2.3757331863640191e-26, -2.5940208040151426e-27, -1.9747814940166648e-28]],
        [[7.6595525154120586e-2, 4.7632803455015742e-2, 1.8217696959685258e-2, 4.1848790739853530e-3, 5.5489673272775050e-4, 3.9889008045829008e-5, 1.4075858922649546e-6, 2.0660548948256312e-8, 9.2713223561252170e-11, 6.2958861037584972e-14], [-1.2514045284000109e-3, -8.2415225277298086e-4, -3.5212354655842912e-4, -9.4748482176316509e-5, -1.5348726139615276e-5, -1.4032759622812039e-6, -6.5857077354328329e-8, -1.3667502686731279e-9, -9.6553163252366714e-12, -1.3547679218050163e-14], [1.1544117629189670e-5, 1.0802143056290994e-5, 7.0754444618089655e-6, 2.7522006817829625e-6, 5.9812429157503347e-7, 6.9190156879090074e-8, 3.9578515626781468e-9, 9.8718007608718145e-11, 8.5611043777337309e-13, 1.6684315658318405e-15], [-4.6418949898215672e-8, -1.5557172195457885e-7, -1.6583178445945764e-7, -8.1055947030832126e-8, -2.0346946871701598e-8, -2.6555153814634727e-9, -1.7227130778850040e-10, -5.0115702215135895e-12, -5.3991446569957316e-14, -1.5354628397011077e-16], [1.5649738423015584e-9, 2.0768899097735306e-9, 1.9763926198943866e-9, 1.1008545935995938e-9, 3.4238334676007351e-10, 5.7199919641326035e-11, 4.8293553897182628e-12, 1.8610180510806050e-13, 2.7557169537463860e-15, 1.1996206099933658e-17], [-7.9854599774700669e-11, -2.3703879500014286e-11, 1.3478363909964605e-12, -3.2988314818750503e-12, -3.7917777488702099e-12, -1.1285991749806334e-12, -1.3657681936693714e-13, -6.9550874415064366e-15, -1.3515216877177852e-16, -8.4325197304241150e-19], [-1.8245552904817854e-12, 4.6004257769329298e-13, 1.6329402321633017e-12, 1.0693288564259085e-12, 3.4345537107749047e-13, 6.0705554962442527e-14, 5.8790358338240154e-15, 2.9011721655335194e-16, 6.3748077272003797e-18, 5.3517640797572888e-20], [9.7557336235436239e-14, -1.0872498400988891e-14, -6.2989098514824441e-14, -3.8516523101582451e-14, -1.1161040311314525e-14, -1.8255981641292468e-15, -1.7757944779171205e-16, -9.7996909518887993e-18, -2.6581315927732330e-19, -3.0790658113310885e-21], [4.0052092331891588e-15, -1.4998785022268220e-16, -2.0535466344682249e-15, -1.1126737507619502e-15, -2.2680596282507492e-16, -1.1672146641073941e-17, 1.8572744540897863e-18, 2.5112854283887881e-19, 1.0128517499651782e-20, 1.6331332980410075e-22], [-1.2799283140852928e-16, 8.7091497416688695e-18, 6.8561902835427782e-17, 3.5940331163731631e-17, 7.1243266297823245e-18, 3.5289258664291821e-19, -5.9726346537807200e-20, -8.4465321581853067e-21, -3.8929938691898468e-22, -8.0730533614903148e-24], [-7.5028779225117438e-18, 3.8794489395108636e-19, 4.1295720035076894e-18, 2.4067257730410220e-18, 6.1267262227108643e-19, 8.0245675255990501e-20, 6.1561506734214157e-21, 3.4340546127617759e-22, 1.4372838264724655e-23, 3.7179019763090568e-25], [1.4457045139534206e-19, -1.3617969006798184e-20, -8.0549270528875455e-20, -4.2085697696537977e-20, -9.2113235809686747e-21, -1.0072159219815931e-21, -7.9969013716157998e-23, -7.1658648647389218e-24, -4.5960088315462530e-25, -1.5994059754890675e-26], [1.3224808947284276e-20, -6.6655086678065419e-22, -7.2256617714360995e-21, -4.1620104807599387e-21, -1.0172201178836522e-21, -1.1545522887234293e-22, -5.1158669416201055e-24, 5.8486818748195841e-26, 1.4213317176863395e-26, 6.4946679957523739e-28], [-1.1964414823305591e-22, 1.8710272496572834e-23, 6.7612570699628089e-23, 2.9091638143860724e-23, 3.9047538017706583e-24, -1.3856896606973145e-25, -7.3478357235501918e-26, -7.4344924231983395e-27, -4.9771181356596985e-28, -2.4967356381802788e-29]],
        [[7.4183519142808688e-2, 4.6065381506932208e-2, 1.7564139283869614e-2, 4.0145321098635662e-3, 5.2827451317513508e-4, 3.7545189452850502e-5, 1.3018051472423941e-6, 1.8556414679108008e-8, 7.8621145336243678e-11, 4.5051504575669746e-14], [-1.1609854334772583e-3, -7.4467030750178409e-4, -3.0292984408266643e-4, -7.6320128780589681e-5, -1.1450683214143394e-5, -9.6295049613153936e-7, -4.1315437253936382e-8, -7.7546254392633715e-10, -4.8102536306752097e-12, -5.2476687537064361e-15], [1.1079928467364728e-5, 9.1206658639998095e-6, 5.2811063275389679e-6, 1.8864193581145954e-6, 3.8546157693513894e-7, 4.2278108342790836e-8, 2.2845526247477128e-9, 5.2858256120998394e-11, 4.0486470691504109e-13, 5.8662264638655618e-16], [-3.5417214061312730e-8, -1.2564299478665843e-7, -1.3255937228257948e-7, -6.2994011407860021e-8, -1.5144197182137648e-8, -1.8595320477715970e-9, -1.1076802370189807e-10, -2.8481840375300497e-12, -2.5216637334588687e-14, -4.8075784929586146e-17], [-1.9799108716957257e-10, 1.6872634841312456e-9, 2.2270075731415098e-9, 1.1904030020836704e-9, 3.2094156437362441e-10, 4.4957330672675233e-11, 3.1377221620099715e-12, 9.8200443762339854e-14, 1.1259102162563283e-15, 3.1920067311669623e-18], [-8.2224344288192527e-11, -1.6498282466887177e-11, 1.5100314799280456e-11, 7.1133717907918845e-12, 2.5316251506694382e-13, -2.9719946923068683e-13, -4.8967936555882189e-14, -2.5779755014250339e-15, -4.4630130019564504e-17, -1.9491814326044356e-19], [1.7138826609681483e-12, 1.4817164241597643e-13, -5.1765922249708458e-13, -2.1637101656782174e-13, -6.6753395712492642e-15, 9.7485367586731121e-15, 1.6937853044040146e-15, 9.7936742016854230e-17, 1.9707834022382014e-18, 1.1328779052182046e-20], [1.1552286317092188e-13, -9.2003203414473979e-15, -6.9165931017776308e-14, -4.1352847166491118e-14, -1.1105596721470376e-14, -1.5491466874689817e-15, -1.1605370704277763e-16, -4.5784502859549309e-18, -8.5460105937078526e-20, -6.0468632825952004e-22], [-3.1901178345581921e-15, 2.4885054176766632e-16, 1.8364513232988377e-15, 1.0545659937392789e-15, 2.6849221586062371e-16, 3.5646006919311726e-17, 2.6839246307198015e-18, 1.2040293895264141e-19, 2.9061361671658676e-21, 2.9271780383070610e-23], [-1.7605093747635249e-16, 7.8763494262473991e-18, 9.5015075698095428e-17, 5.4622315204651573e-17, 1.3149940902282859e-17, 1.4227095623516389e-18, 5.4192342143674017e-20, -8.1728679702440151e-22, -8.3878974410808840e-23, -1.3303298139688156e-24], [6.0289347226571444e-18, -4.0056246617939845e-19, -3.2998209185934974e-18, -1.8139252909679711e-18, -4.1254036538780476e-19, -4.0934960747638582e-20, -1.2516970282528103e-21, 4.3949843301757648e-23, 3.1496091030075663e-24, 5.8359542577342108e-26], [2.5963357585551322e-19, -1.0072168168861655e-20, -1.4159085979550828e-19, -8.4287951479017120e-20, -2.1684695837579747e-20, -2.7421278734461879e-21, -1.7303386458222518e-22, -5.7701737630556447e-24, -1.3194515252448160e-25, -2.4170524122108047e-27], [-1.0938952491722411e-20, 7.2646857756155809e-22, 6.0155302029669863e-21, 3.3393738259382438e-21, 7.8158156836400424e-22, 8.5766918927794764e-23, 4.3815289748188522e-24, 1.1948696646601135e-25, 3.3787437426393932e-27, 9.1865895000376345e-29], [-3.7428559557928199e-22, 9.8992916061959518e-24, 2.0298234744970783e-22, 1.2403037849573408e-22, 3.2714134968654396e-23, 4.1850655330603095e-24, 2.4777127254774278e-25, 5.2776618306461689e-27, -3.7220851839133546e-29, -3.2932660267033161e-30]],
        [[7.1327915791685746e-2, 4.4255065034847678e-2, 1.6844268217512782e-2, 3.8389916323343227e-3, 5.0299915421040942e-4, 3.5520117980694226e-5, 1.2195748643437448e-6, 1.7106719599777803e-8, 7.0282843768593713e-11, 3.6945722646579715e-14], [-1.6788294355180448e-3, -1.0552507477610662e-3, -4.1251535546641460e-4, -9.8043738839047609e-5, -1.3639296416056706e-5, -1.0460674142471132e-6, -4.0234062979126776e-8, -6.6269334386446310e-10, -3.4802403999709503e-12, -2.8968493397767917e-15], [2.6616650159156419e-5, 1.8994876920146365e-5, 9.2136652793149359e-6, 2.8387479191669043e-6, 5.1862628965759275e-7, 5.2131842680672463e-8, 2.6113783802567813e-9, 5.5831623658790283e-11, 3.8396408321725873e-13, 4.4127129367773547e-16], [-2.2434205497914608e-7, -3.8863609055724700e-7, -3.4849310291583166e-7, -1.5483981429707626e-7, -3.5478623545520043e-8, -4.1456736288563854e-9, -2.3191382393727045e-10, -5.4445082367371087e-12, -4.1366795444209736e-14, -5.5901499098807573e-17], [-8.3023544119232199e-9, 8.4418779848451894e-9, 1.4300721017682355e-8, 7.5324457949386025e-9, 1.8796295812349342e-9, 2.3412531534947970e-10, 1.3969928468426220e-11, 3.5549814838279710e-13, 3.0480595098449701e-15, 5.2145810379772361e-18], [1.9111021393455396e-11, -1.5523858866513759e-10, -2.1597049433038475e-10, -1.2318659851966929e-10, -3.5677256530053143e-11, -5.3662720938265015e-12, -3.9924130893601239e-13, -1.3115397339031972e-14, -1.5287393614080123e-16, -3.9902541719006761e-19], [4.2749771511640269e-11, 5.0529703593919309e-13, -1.9062123146337953e-11, -1.0461625309380858e-11, -2.2479564695736546e-12, -1.9528345289564930e-13, -3.7930758598368887e-15, 2.1605066652539832e-16, 6.4925813699146382e-18, 2.9617434836543450e-20], [-1.6146065588674558e-12, 4.3966240728236886e-14, 7.9394729038230826e-13, 4.2851547272044467e-13, 9.0987688735381763e-14, 7.5101651339033317e-15, 6.5826585956850845e-17, -1.5375463777005537e-17, -4.3236713112812557e-19, -2.3317541884320045e-21], [-1.1181886647378227e-13, 6.1613590735273851e-15, 6.2970120072056333e-14, 3.7280204807126264e-14, 9.6521747130695093e-15, 1.2466354810694915e-15, 8.1042716636158614e-17, 2.5581481672784118e-18, 3.5822037561613113e-20, 1.7705325169817020e-22], [9.8736035908483310e-15, -5.5501441754271938e-16, -5.4456213090087283e-15, -3.1291942954440991e-15, -7.7161989235124208e-16, -9.2133227228691989e-17, -5.3147439010983272e-18, -1.4484475507328308e-19, -1.9040043310186617e-21, -1.1571184553554556e-23], [1.2462631735139774e-16, -4.6466155166023035e-19, -6.6306091074456544e-17, -4.2062041459635155e-17, -1.1409436225105306e-17, -1.4645236227016748e-18, -7.9712972002485671e-20, -9.1729854187044684e-22, 3.7356657653559178e-23, 6.5640135560980585e-25], [-4.2631716095550622e-17, 2.0355501997189010e-18, 2.3273289993011068e-17, 1.3501892639137894e-17, 3.3418283522244387e-18, 3.9325465408081639e-19, 2.0931685163633146e-20, 4.0939052529243414e-22, 4.5984827367068490e-25, -3.7693473217446789e-26], [8.5804635417673790e-19, -6.9097333948595220e-20, -4.7361529480660066e-19, -2.5287367223777122e-19, -5.5500263772834937e-20, -5.3106899206862632e-21, -1.7675037410732458e-22, 1.3993360217807800e-24, 1.5295210287769277e-25, 2.4568809394852185e-27], [1.3942832668853237e-19, -5.1097804170268758e-21, -7.5885836371203080e-20, -4.5289599641679840e-20, -1.1638792384530458e-20, -1.4503353294043922e-21, -8.5527526832171547e-23, -2.1772266466176612e-24, -2.2190934194210354e-26, -1.5388243052908107e-28]],
        [[6.8173262433826624e-2, 4.2283224166009950e-2, 1.6082159969694137e-2, 3.6610127963250355e-3, 4.7883802065989723e-4, 3.3726369865833948e-5, 1.1534571268026002e-6, 1.6077200692790201e-8, 6.5280555608611867e-11, 3.3270396931455967e-14], [-1.4786235024280485e-3, -9.1987880244213658e-4, -3.5208723683445077e-4, -8.0967475146012205e-5, -1.0749531567803952e-5, -7.7358284696645782e-7, -2.7297227033210038e-8, -3.9904205357381928e-10, -1.7558678334845894e-12, -1.0635780985354579e-15], [2.3269953295995489e-5, 1.5042980322376406e-5, 6.2072490667031345e-6, 1.5924896892648111e-6, 2.4347150026899092e-7, 2.0800591870240430e-8, 8.9960171557981458e-10, 1.6754379072939913e-11, 9.9526010748395134e-14, 9.1830945789966954e-17], [-3.1705257215780949e-7, -2.7713807105755631e-7, -1.6962507372134906e-7, -6.2431518117405300e-8, -1.2863927318098605e-8, -1.3980733218132056e-9, -7.3503646025156595e-11, -1.6113615606311765e-12, -1.1074066855972698e-14, -1.1977275395578878e-17], [-2.1209049603461584e-9, 5.6045132947071722e-9, 7.6728961420851360e-9, 3.8152708737177737e-9, 9.1113307888044662e-10, 1.0795957038508791e-10, 6.0265987472783228e-12, 1.3902286423594554e-13, 1.0115882825092135e-15, 1.2080297506339026e-18], [3.9278251370517866e-10, -1.2165089060923266e-10, -3.4119949042251223e-10, -1.8937299469546393e-10, -4.7509695362703200e-11, -5.8376364866140468e-12, -3.3830037198376588e-13, -8.1901352491746340e-15, -6.4253139427724917e-17, -8.9590358565235241e-20], [-7.3958095671252195e-12, 2.1247659151979399e-12, 6.5082504137738809e-12, 3.8241880673649553e-12, 1.0326127784257356e-12, 1.3956098182821585e-13, 9.1425638110805702e-15, 2.5969411620635123e-16, 2.5356280212483579e-18, 4.9915581032019257e-21], [-9.4396821775510132e-13, 2.0461886519540359e-14, 4.6842838263220935e-13, 2.6227686704430387e-13, 6.0263404276402884e-14, 6.2011687660106888e-15, 2.5189057474472946e-16, 2.0232267919558589e-18, -3.9562043246046786e-20, -2.3219208271670408e-22], [7.7438853777372359e-14, -3.4978006818665672e-15, -4.1427358089316733e-14, -2.3614057762199106e-14, -5.6656708367784311e-15, -6.3203577132168228e-16, -3.0592145151493179e-17, -4.9947218120456012e-19, -3.7240040623427813e-22, 1.2680961180045272e-23], [-1.0586918927360460e-15, 5.4123059372381439e-17, 5.6284022327073020e-16, 3.1127317086786509e-16, 7.0524265216073259e-17, 6.9057845114467316e-18, 2.2052483217877335e-19, -2.9200344774063282e-21, -1.7132462175799950e-22, -9.8890705447711357e-25], [-2.0222673663723183e-16, 9.3320297672331336e-18, 1.1072972691862914e-16, 6.4840332154020633e-17, 1.6314198961035480e-17, 1.9844534766255689e-18, 1.1423803439346091e-19, 2.8469321545060349e-21, 2.6496823743468277e-23, 7.5722845933160711e-26], [1.4255356510721776e-17, -6.9326159521194915e-19, -7.7961841001089249e-18, -4.5241865999968348e-18, -1.1230999241105590e-18, -1.3368003837560568e-19, -7.4212828033317495e-21, -1.7395278442544157e-22, -1.4826287954419469e-24, -4.2718178031767543e-27], [-7.9816908289548064e-20, 8.2611345985300866e-21, 4.4528578020192955e-20, 2.2531947735092335e-20, 4.5696662222064817e-21, 3.8600849042578440e-22, 1.1530792579924032e-23, 1.8238943838326057e-25, 9.8501950265858811e-27, 1.5047746738327597e-28], [-4.2910893348991468e-20, 1.7012720783327201e-21, 2.3376384424074403e-20, 1.3845068543867663e-20, 3.5214224222393400e-21, 4.3164533739130360e-22, 2.4652913065275990e-23, 5.7408782788509699e-25, 3.8526736190817619e-27, -2.3490850231493727e-30]],
        [[6.5390057381350490e-2, 4.0554244782017081e-2, 1.5422371592045365e-2, 3.5100128675111337e-3, 4.5893170082306993e-4, 3.2308197288431369e-5, 1.1041362676154375e-6, 1.5371778098306197e-8, 6.2286331345295571e-11, 3.1586276102936854e-14], [-1.3077517151637788e-3, -8.1147989595313131e-4, -3.0893508672129373e-4, -7.0434999860586806e-5, -9.2333226632458655e-6, -6.5246435957472441e-7, -2.2421333941881202e-8, -3.1481151603759557e-10, -1.2943102230495650e-12, -6.7776639475288978e-16], [1.9475604238344279e-5, 1.2184108558440593e-5, 4.7172473806011789e-6, 1.1043826472598826e-6, 1.5038113649267333e-7, 1.1200213329339500e-8, 4.1382584252052790e-10, 6.4378636816911707e-12, 3.0908640482656959e-14, 2.1359011073885262e-17], [-3.0251936510278590e-7, -2.0415388655763884e-7, -9.0776901629964833e-8, -2.5499368004130408e-8, -4.2784389826114637e-9, -3.9854978467483233e-10, -1.8586373897109110e-11, -3.6820665314058166e-13, -2.2870988113415785e-15, -2.1338432801851165e-18], [2.9992593965701276e-9, 3.6754264592386385e-9, 2.8428437338478859e-9, 1.1809200984854578e-9, 2.5910052909580219e-10, 2.9108278846276948e-11, 1.5548006337347348e-12, 3.4179180676270786e-14, 2.3186595105262509e-16, 2.3792159401603531e-19], [1.1324481804001616e-10, -7.3290330302840362e-11, -1.4242079234776094e-10, -7.4927382780413394e-11, -1.8191166469060207e-11, -2.1608329524123453e-12, -1.1987014206561973e-13, -2.7216311947666605e-15, -1.9156067364844527e-17, -2.0961690298628877e-20], [-1.0062670052575244e-11, 1.6572279416944827e-12, 6.9627996663224870e-12, 3.9539215562489855e-12, 9.9052381448824659e-13, 1.2026376023875996e-13, 6.8192172107893496e-15, 1.5922907613344044e-16, 1.1711645858909754e-18, 1.4062158641448206e-21], [3.3926288814729627e-13, -3.4197760824868584e-14, -2.1183533622938888e-13, -1.2437296335834141e-13, -3.2019080300061391e-14, -4.0173827112672351e-15, -2.3806933909505560e-16, -5.9221915947828092e-18, -4.8115364331315288e-20, -6.9867435690301346e-23], [4.7075708905939951e-15, -3.4906420333886877e-17, -2.1066069391373194e-15, -1.0817190791236819e-15, -2.0689286207294535e-16, -1.3076479205290385e-17, 2.8726076752203964e-19, 4.4553082618887170e-20, 8.2017277112311947e-22, 2.3779216300470468e-24], [-1.2425686249363234e-15, 5.8507472193428043e-17, 6.7086890196363476e-16, 3.8467922988100170e-16, 9.3397471664083955e-17, 1.0663379058322294e-17, 5.4337935159458210e-19, 1.0346170572027224e-20, 4.4160621049292494e-23, -4.6052127474497374e-26], [6.7792534058881812e-17, -3.1843166768519560e-18, -3.6890844702898329e-17, -2.1355134909011213e-17, -5.2606647103272923e-18, -6.1419549514003068e-19, -3.2460217776405979e-20, -6.6210102671877448e-22, -3.4499074814839985e-24, 1.0173014150492855e-27], [-9.5790523340958970e-19, 4.3975886263279247e-20, 5.2064623327296097e-19, 3.0151424026918369e-19, 7.4086908341201504e-20, 8.5608378747803536e-21, 4.3763348403938459e-22, 7.9205176229592114e-24, 1.5637724450599181e-26, -1.9500030590427308e-28], [-1.2139249734177120e-19, 5.4579572854561857e-21, 6.6305759089985841e-20, 3.8814893055534512e-20, 9.7381469458666079e-21, 1.1744377243136803e-21, 6.6088221803335459e-23, 1.5509302710581468e-24, 1.2251887868134009e-26, 2.3074604095673980e-29], [1.0117517240691582e-20, -4.4885382762218419e-22, -5.5222286886841696e-21, -3.2346422645881714e-21, -8.1161246203003845e-22, -9.7773781115312152e-23, -5.4776073903786937e-24, -1.2675645126739234e-25, -9.5745081515295501e-28, -1.5621123847132204e-30]],
        [[6.2919508412975519e-2, 3.9021640144975123e-2, 1.4839224137586991e-2, 3.3771781987200750e-3, 4.4154143239871968e-4, 3.1081679547923756e-5, 1.0621062409601280e-6, 1.4784193588315577e-8, 5.9888409261796703e-11, 3.0351033141917982e-14], [-1.1655491927545909e-3, -7.2290562176112098e-4, -2.7494848340636589e-4, -6.2588841890567881e-5, -8.1858905878599607e-6, -5.7652324331967748e-7, -1.9715007973174551e-8, -2.7473137609120634e-10, -1.1149673369788342e-12, -5.6729094450723626e-16], [1.6174271005715918e-5, 1.0044875359688124e-5, 3.8308566023676708e-6, 8.7585811656667367e-7, 1.1528756793824702e-7, 8.1942678793488364e-9, 2.8394174748442960e-10, 4.0362497715428851e-12, 1.6927580763116644e-14, 9.2129880809497982e-18], [-2.4636696218556593e-7, -1.5522294934796020e-7, -6.0954282560675094e-8, -1.4578044542685429e-8, -2.0426763410962972e-9, -1.5772808459318997e-10, -6.0892882746790995e-12, -9.9803458298940991e-14, -5.0920286871394412e-16, -3.7623591129231344e-19], [3.5895712975942873e-9, 2.5346439939007023e-9, 1.2085937168265083e-9, 3.6492812592019146e-10, 6.5173321277376066e-11, 6.3761141908675234e-12, 3.0823117971837257e-13, 6.2526453894193015e-15, 3.9232600137321926e-17, 3.6035863010072781e-20], [-2.2928893777425925e-11, -4.3926072025791325e-11, -4.0306248552313906e-11, -1.7863050264148936e-11, -4.0304965988169578e-12, -4.5830442330048080e-13, -2.4553908383712118e-14, -5.3729776844364398e-16, -3.5897183289219776e-18, -3.5260996032664460e-21], [-2.1773056432905906e-12, 8.5882697419147690e-13, 2.0851978774311779e-12, 1.1242534213466017e-12, 2.7437109654722067e-13, 3.2532818618817480e-14, 1.7923850470677729e-15, 4.0158999617853650e-17, 2.7552844029829394e-19, 2.8308380678824163e-22], [1.6920762555885603e-13, -2.0317493752537283e-14, -1.0772539862341157e-13, -6.1647543698371058e-14, -1.5396293594627389e-14, -1.8536227881025963e-15, -1.0362123875063307e-16, -2.3639642326737911e-18, -1.6677044615336583e-20, -1.8154855021099779e-23], [-7.2630087149988698e-15, 5.1502060018352737e-16, 4.2254732080965201e-15, 2.4725009943401017e-15, 6.2616532375618398e-16, 7.6530347217243733e-17, 4.3636155670258032e-18, 1.0246190480171352e-19, 7.5788084254682651e-22, 9.0985104281151834e-25], [1.4145683965465053e-16, -7.7693707694738156e-18, -8.1411962600716664e-17, -4.9111408206165886e-17, -1.2902334191798073e-17, -1.6556206434719976e-18, -1.0082190636015896e-19, -2.5941029013305923e-21, -2.1965551349653920e-23, -3.3276341061697589e-26], [6.2931616267769580e-18, -3.3386913383806330e-19, -3.3771852345190740e-18, -1.8884794594678292e-18, -4.4168164855028973e-19, -4.7422611927205540e-20, -2.1558602657305648e-21, -3.0905311240820696e-23, 1.9235279633445418e-26, 6.7245362046258612e-28], [-7.3809442892029848e-19, 3.5726562109765784e-20, 4.0227368593620584e-19, 2.3237474979584638e-19, 5.7125433169930620e-20, 6.6570510006022402e-21, 3.5178027193838788e-22, 7.2362461796789543e-24, 4.0170860537480969e-26, 1.0360461927062957e-29], [3.5406457684445590e-20, -1.6157466132531961e-21, -1.9315257100181101e-20, -1.1258735831968038e-20, -2.8021654924654120e-21, -3.3256147630812022e-22, -1.8079868539606144e-23, -3.9055078785170318e-25, -2.4128870659239956e-27, -1.3345040752981284e-30], [-7.4710438981219292e-22, 3.0987637070554431e-23, 4.0708090237811870e-22, 2.3974028235739824e-22, 6.0447247167604013e-23, 7.3014686229173337e-24, 4.0665171231835302e-25, 9.0780596415749535e-27, 5.8308329926846406e-29, 2.5881629130711157e-32]],
        [[6.0709100726988388e-2, 3.7650736140631909e-2, 1.4317858032478839e-2, 3.2585101461986436e-3, 4.2602391152007245e-4, 2.9989089220901141e-5, 1.0247581173228720e-6, 1.4264050469975142e-8, 5.7779571972595466e-11, 2.9280348927127982e-14], [-1.0470512598225906e-3, -6.4936822612106249e-4, -2.4694640765505185e-4, -5.6202430348977466e-5, -7.3482962352933164e-6, -5.1729674857722521e-7, -1.7677957247701547e-8, -2.4609619520458724e-10, -9.9705825534788705e-13, -5.0546715302436947e-16], [1.3541548321176625e-5, 8.3997062560651152e-6, 3.1954111370849099e-6, 7.2764718136252295e-7, 9.5215445302103367e-8, 6.7107052304720537e-9, 2.2971674718025326e-10, 3.2060206297968474e-12, 1.3043567622121609e-14, 6.6692273352085068e-18], [-1.9423528813033649e-7, -1.2074058081307081e-7, -4.6136101515372935e-8, -1.0580407791341211e-8, -1.3988175496685955e-9, -1.0003480371937274e-10, -3.4959906056270814e-12, -5.0301634179438307e-14, -2.1484544622938633e-16, -1.2063445617045051e-19], [2.8790685211656626e-9, 1.8245353760111563e-9, 7.2468811688207550e-10, 1.7620678570988056e-10, 2.5214251192814711e-11, 1.9956138172206761e-12, 7.9182476343530078e-14, 1.3357240029794163e-15, 7.0080613745209059e-18, 5.2817298072530546e-21], [-3.9260738182295497e-11, -2.8574446790114119e-11, -1.4213649927337511e-11, -4.4607815846144446e-12, -8.2043418748918223e-13, -8.1901535318678578e-14, -4.0079697418382455e-15, -8.1702387458875003e-17, -5.1056428173700592e-19, -4.5823374904865319e-22], [1.7132816348570458e-13, 4.7247141492993276e-13, 4.7012453619369756e-13, 2.1360090325021738e-13, 4.8621960124912755e-14, 5.5393161650612698e-15, 2.9600198936951018e-16, 6.4300361148633350e-18, 4.2314316545269055e-20, 4.0071555130140063e-23], [2.7111451445431198e-14, -8.9166474242251846e-15, -2.3829288711890941e-14, -1.2944956310483977e-14, -3.1585558411663891e-15, -3.7317319826424094e-16, -2.0420956381334134e-17, -4.5233903217188340e-19, -3.0400741642297375e-21, -2.9774323010799642e-24], [-2.0142390529100146e-15, 2.1341803560958568e-16, 1.2453139812797475e-15, 7.1338265311549632e-16, 1.7753298844828339e-16, 2.1234526644225071e-17, 1.1749138939156545e-18, 2.6367596034332937e-20, 1.8069180646860238e-22, 1.8399947487240636e-25], [9.5667316093122003e-17, -6.1006131157487183e-18, -5.4562662931363610e-17, -3.1818699049412848e-17, -7.9938007127317176e-18, -9.6499294436289275e-19, -5.4015466920210797e-20, -1.2325539536161074e-21, -8.6797046152404199e-24, -9.3536439226147458e-27], [-3.1186902077114221e-18, 1.5541367175823530e-19, 1.7381210693810173e-18, 1.0260237575286743e-18, 2.6079854241427295e-19, 3.1961519504140847e-20, 1.8270259821144988e-21, 4.3003441399894107e-23, 3.1844873995883257e-25, 3.7919881746170592e-28], [4.1732879147774553e-20, -1.4168423285211290e-21, -2.3230468747222716e-20, -1.4298285098933438e-20, -3.8259294562368169e-21, -5.0138156208077366e-22, -3.1292206637240240e-23, -8.2797493343547780e-25, -7.2198161895115154e-27, -1.1134791653248459e-29], [2.7698930302442738e-21, -1.5645788865526307e-22, -1.5096489839255364e-21, -8.5172273055852105e-22, -2.0256301914044943e-22, -2.2413631974434936e-23, -1.0837178003627166e-24, -1.8552139321553219e-26, -5.2802417635776703e-29, 1.4331498753411347e-31], [-2.5372973045509092e-22, 1.2348191943231998e-23, 1.3856856575616815e-22, 8.0177508904778307e-23, 1.9765037794708237e-23, 2.3137885362611868e-24, 1.2325033057024438e-25, 2.5776976046226495e-27, 1.5034677842863535e-29, 7.3439554497330511e-33]],
        [[5.8716464542768408e-2, 3.6414933168711369e-2, 1.3847902210566864e-2, 3.1515546253201451e-3, 4.1204009716756588e-4, 2.9004702582193968e-5, 9.9111941308903309e-7, 1.3795793914587683e-8, 5.5882634263867629e-11, 2.8318889683023065e-14], [-9.4731641799059641e-4, -5.8750965359002769e-4, -2.2341902299781110e-4, -5.0846617704532614e-5, -6.6478050276731894e-6, -4.6796074828432713e-7, -1.5990798698146737e-8, -2.2258482448555750e-10, -9.0164015519222543e-13, -4.5692746731137539e-16], [1.1462390345137247e-5, 7.1089078642170679e-6, 2.7034858249517616e-6, 6.1530675160610235e-7, 8.0453589036680855e-8, 5.6640874436105812e-9, 1.9358291396749112e-10, 2.6952920011878006e-12, 1.0922622037423491e-14, 5.5399079287462534e-18], [-1.5406826290214438e-7, -9.5577037707375209e-8, -3.6367088405479579e-8, -8.2841803530799283e-9, -1.0845505739853597e-9, -7.6491295336299311e-11, -2.6209737476469399e-12, -3.6631795110873783e-14, -1.4937046720543129e-16, -7.6693262577672715e-20], [2.1695441864497278e-9, 1.3494860255759608e-9, 5.1632068798020604e-10, 1.1864880696341608e-10, 1.5731656424757236e-11, 1.1294553202773855e-12, 3.9680410726432011e-14, 5.7501094321168752e-16, 2.4801827497358607e-18, 1.4121698718459122e-21], [-3.0889946149701547e-11, -1.9623876152872639e-11, -7.8312430254081677e-12, -1.9167377115964623e-12, -2.7645758030612405e-13, -2.2069589032926237e-14, -8.8310866359211204e-16, -1.5003343999785309e-17, -7.8994761029512554e-20, -5.9110709372360561e-23], [4.0051213940766752e-13, 2.9289433703839046e-13, 1.4658549014773239e-13, 4.6221595498708235e-14, 8.5221428267687279e-15, 8.5085518358683226e-16, 4.1540615974341917e-17, 8.4213495307123608e-19, 5.2049270430214890e-21, 4.5549848461234167e-24], [-1.7197521453084585e-15, -4.5890181233473837e-15, -4.5343344582067989e-15, -2.0527945777068956e-15, -4.6570141806048826e-16, -5.2835730290294712e-17, -2.8072543515505259e-18, -6.0461381225514618e-20, -3.9217770499581229e-22, -3.6003565032935678e-25], [-2.4510327675290264e-16, 8.1956721900823456e-17, 2.1665854378395633e-16, 1.1734530856293602e-16, 2.8535825674143484e-17, 3.3560250122032378e-18, 1.8244410164294496e-19, 4.0006788940498968e-21, 2.6427320033117124e-23, 2.4922136317082864e-26], [1.8021706399093209e-17, -1.8965828485579666e-18, -1.1102063712693898e-17, -6.3446331250239330e-18, -1.5729551420548744e-18, -1.8709529920825488e-19, -1.0267290027682224e-20, -2.2750049293786396e-22, -1.5250737396466612e-24, -1.4791517912871802e-27], [-8.9102223728520165e-19, 5.6111790944248188e-20, 5.0569339032489668e-19, 2.9388412064596059e-19, 7.3432654032217930e-20, 8.7943971637856280e-21, 4.8652629805717658e-22, 1.0902112645670565e-23, 7.4412714853357898e-26, 7.4869499388198334e-29], [3.4090919351970166e-20, -1.7115562175487256e-21, -1.8895148795359587e-20, -1.1073218576800304e-20, -2.7853073714056449e-21, -3.3627331871153807e-22, -1.8810241282934073e-23, -4.2844776384162500e-25, -3.0038014462328223e-27, -3.1912874859790555e-30], [-9.4129570031771266e-22, 4.0804515814509869e-23, 5.1746307949083108e-22, 3.0628087276474954e-22, 7.7919971269328259e-23, 9.5522945434697085e-24, 5.4591178530346172e-25, 1.2831865295278456e-26, 9.4591459672241353e-29, 1.1066041941667116e-31], [1.0822288856105736e-23, -2.7208433849035559e-25, -5.9270368155333893e-24, -3.6724549362441900e-24, -9.8738436302203310e-25, -1.2997805322993916e-25, -8.1439186357248735e-27, -2.1590622191191216e-28, -1.8753591717374620e-30, -2.8186522280237628e-33]],
        [[5.6908063897460780e-2, 3.5293394077333187e-2, 1.3421402066453247e-2, 3.0544901066739081e-3, 3.9934968183938336e-4, 2.8111385275631170e-5, 9.6059377824273244e-7, 1.3370893188351457e-8, 5.4161475492067792e-11, 2.7446668433346886e-14], [-8.6246614081377600e-4, -5.3488657283007533e-4, -2.0340714908706487e-4, -4.6292127136888970e-5, -6.0523200491554024e-6, -4.2604058419883310e-7, -1.4558235829122532e-8, -2.0264214593373492e-10, -8.2084363829311603e-13, -4.1596875190962061e-16], [9.8030815226559729e-6, 6.0797114591668546e-6, 2.3120060185449540e-6, 5.2617745270999269e-7, 6.8793975224421719e-8, 4.8426639306640136e-9, 1.6548131995134288e-10, 2.3034568575917314e-12, 9.3309690876083888e-15, 4.7288720611193625e-18], [-1.2380224775035678e-7, -7.6782183778699331e-8, -2.9200509883129077e-8, -6.6461775652184649e-9, -8.6905223795980834e-10, -6.1186948966080997e-11, -2.0913937393652168e-12, -2.9122755686589383e-14, -1.1804388631157441e-16, -5.9894053806363772e-20], [1.6412306704579647e-9, 1.0182055240586988e-9, 3.8747425005442461e-10, 8.8280877618239526e-11, 1.1560747063429703e-11, 8.1566725992116191e-13, 2.7963460461043995e-14, 3.9111570493934367e-16, 1.5965425615087019e-18, 8.2116597492896813e-22], [-2.2328812210029684e-11, -1.3890626213518643e-11, -5.3160091385911308e-12, -1.2220769450023022e-12, -1.6211861002179056e-13, -1.1646562090851925e-14, -4.0944932289553231e-16, -5.9368311797993021e-18, -2.5606896946694056e-20, -1.4537529596156449e-23], [3.0456712733237345e-13, 1.9324421099646774e-13, 7.6926293077829049e-14, 1.8759013429898252e-14, 2.6925428246690255e-15, 2.1363153352514701e-16, 8.4831638158276711e-18, 1.4270616563420472e-19, 7.4099168983948475e-22, 5.4116231649308369e-25], [-3.8195095117268174e-15, -2.7419673052136774e-15, -1.3375158584607028e-15, -4.1184750613046927e-16, -7.4484223580181780e-17, -7.3217526584579538e-18, -3.5268551572947015e-19, -7.0554784795920249e-21, -4.2915451940922938e-23, -3.6575049261087482e-26], [2.1420175223605667e-17, 4.0527642393687335e-17, 3.6952409583716197e-17, 1.6273228813054833e-17, 3.6415027356857384e-18, 4.0932237287611113e-19, 2.1566856544053940e-20, 4.6004040608793841e-22, 2.9427956962326013e-24, 2.6298807421299893e-27], [1.6739433727756121e-18, -6.7357963399219281e-19, -1.6109627383776860e-18, -8.6210079440773324e-19, -2.0836358845813439e-19, -2.4371166186779338e-20, -1.3162704732863002e-21, -2.8600807706938208e-23, -1.8615062927920702e-25, -1.7023647553538573e-28], [-1.2656231565676393e-19, 1.4460312680870098e-20, 7.9160045231344105e-20, 4.5012489806535924e-20, 1.1113842160163004e-20, 1.3153028521528502e-21, 7.1678387714429411e-23, 1.5716812702092876e-24, 1.0352215078528123e-26, 9.6720448886750152e-30], [6.3492825513880728e-21, -4.1489551890460764e-22, -3.6123939210828079e-21, -2.0916797787923942e-21, -5.2037060399071439e-22, -6.1945379700484245e-23, -3.3972253394960011e-24, -7.5118825106127678e-26, -5.0129002605395877e-28, -4.8057490632736485e-31], [-2.5841184889445536e-22, 1.3362495969050597e-23, 1.4317382764690440e-22, 8.3518221649175344e-23, 2.0879754286901381e-23, 2.4991628430073989e-24, 1.3805640608764051e-25, 3.0850479222204979e-27, 2.0942890990226378e-29, 2.0780137188123695e-32], [8.5665535221855099e-24, -3.9497989423099234e-25, -4.7044771556964288e-24, -2.7598907451062036e-24, -6.9396072195845148e-25, -8.3692393301266745e-26, -4.6724978520147248e-27, -1.0606489669575737e-28, -7.3861857406300718e-31, -7.7092294484612389e-34]],
        [[5.5257146044878758e-2, 3.4269523435408012e-2, 1.3032043642122735e-2, 2.9658785328957380e-3, 3.8776443943385627e-4, 2.7295866230075800e-5, 9.3272668052405152e-7, 1.2982999643816492e-8, 5.2590234236371483e-11, 2.6650431165270409e-14], [-7.8956911448355353e-4, -4.8967707044389601e-4, -1.8621481634836073e-4, -4.2379426417552679e-5, -5.5407646347215749e-6, -3.9003054309383612e-7, -1.3327729053612733e-8, -1.8551405888196506e-10, -7.5146183656575971e-13, -3.8080806858542219e-16], [8.4614671980430445e-6, 5.2476558989787699e-6, 1.9955836361040819e-6, 4.5416217976220424e-7, 5.9378041573662080e-8, 4.1797968401072158e-9, 1.4282796808557234e-10, 1.9880839772835188e-12, 8.0531552224016747e-15, 4.0810093446235782e-18], [-1.0075252443833862e-7, -6.2485125697959639e-8, -2.3762021111253511e-8, -5.4078896399882317e-9, -7.0704602057180549e-10, -4.9771871610348922e-11, -1.7007948065138268e-12, -2.3674879066288713e-14, -9.5905100913875196e-17, -4.8605511903947546e-20], [1.2596312531928146e-9, 7.8122732322024425e-10, 2.9710615743328847e-10, 6.7623844664511560e-11, 8.8426696573117260e-12, 6.2260063880346954e-13, 2.1281620818739015e-14, 2.9636477461639869e-16, 1.2013629401448382e-18, 6.0963883824212038e-22], [-1.6194058349242017e-11, -1.0046645808264678e-11, -3.8232024254306211e-12, -8.7106055643017073e-13, -1.1406746134665835e-13, -8.0477957296636608e-15, -2.7588644920909745e-16, -3.8582723506609290e-18, -1.5745152423880486e-20, -8.0915801535170513e-24], [2.1163394161668740e-13, 1.3161382314296027e-13, 5.0335564664192138e-14, 1.1559093261683411e-14, 1.5310135416411412e-15, 1.0974324570251731e-16, 3.8458952218580079e-18, 5.5500514854360448e-20, 2.3756195952087011e-22, 1.3285564074303069e-25], [-2.7660777069505095e-15, -1.7483225483130116e-15, -6.9075418883630756e-16, -1.6661331148217668e-16, -2.3581451460180806e-17, -1.8397523930460468e-18, -7.1639977642523794e-20, -1.1781620129553266e-21, -5.9530576875148678e-24, -4.1866780990855395e-27], [3.3883635717454265e-17, 2.3575023871190577e-17, 1.0985771608813898e-17, 3.2351070344145274e-18, 5.6366603324582120e-19, 5.3782580656577792e-20, 2.5286435130700411e-21, 4.9522420943309085e-23, 2.9481679902153455e-25, 2.4410886888369934e-28], [-2.4916191430379019e-19, -3.2823977533484860e-19, -2.6199037992006829e-19, -1.0958048204361589e-19, -2.3910172556940868e-20, -2.6465664846015409e-21, -1.3782008369305134e-22, -2.9067832768327182e-24, -1.8334934839988918e-26, -1.5994429656286879e-29], [-8.5586229262370082e-21, 5.0291614527711323e-21, 1.0081903229220496e-20, 5.2742778530028061e-21, 1.2625239631654955e-21, 1.4666434520844128e-22, 7.8672584200401708e-24, 1.6947909316672163e-25, 1.0887520747705868e-27, 9.7050753719700996e-31], [7.1761073988295929e-22, -9.7102816996921930e-23, -4.6582361380694530e-22, -2.6273135982594876e-22, -6.4564173003615412e-23, -7.6041382181842797e-24, -4.1183056247292234e-25, -8.9497754060942994e-27, -5.8097864246677292e-29, -5.2690097225847421e-32], [-3.6304334309695205e-23, 2.5667695669114540e-24, 2.0842542181880383e-23, 1.2017921215568289e-23, 2.9782159438215281e-24, 3.5276022678603114e-25, 1.9210825989094716e-26, 4.2033835545114809e-28, 2.7563967104719974e-30, 2.5482588543159693e-33], [1.5102527911067711e-24, -8.1571323739666928e-26, -8.3871262499980761e-25, -4.8741064109450190e-25, -1.2130679527012548e-25, -1.4429815091999716e-26, -7.9004937144083117e-28, -1.7418194075291831e-29, -1.1560910785096041e-31, -1.0944728226984307e-34]],
        [[5.3742097634982904e-2, 3.3329916691201433e-2, 1.2674729185471912e-2, 2.8845596459799236e-3, 3.7713265780782559e-4, 2.6547464202206562e-5, 9.0715304435663368e-7, 1.2627029856612234e-8, 5.1148307426811822e-11, 2.5919725652671269e-14], [-7.2639382257455520e-4, -4.5049684817474257e-4, -1.7131532628933589e-4, -3.8988547227965738e-5, -5.0974347096755515e-6, -3.5882324946418036e-7, -1.2261344495435000e-8, -1.7067061023728723e-10, -6.9133541261187770e-13, -3.5033856120265778e-16], [7.3635004626661258e-6, 4.5667152984969618e-6, 1.7366344300683412e-6, 3.9522941187935946e-7, 5.1673026021484614e-8, 3.6374147707702515e-9, 1.2429406311535306e-10, 1.7300995315402176e-12, 7.0081152956753215e-15, 3.5514077256993576e-18], [-8.2937751990198333e-8, -5.1436565383111252e-8, -1.9560349121015362e-8, -4.4516162841886520e-9, -5.8201309251748408e-10, -4.0969648370569902e-11, -1.3999759299788698e-12, -1.9486883505873477e-14, -7.8935846023514043e-17, -4.0001541187266150e-20], [9.8086184800849961e-10, 6.0831525155663459e-10, 2.3133201781093803e-10, 5.2647854538556578e-11, 6.8833719432045229e-12, 4.8454987202999578e-13, 1.6557994321961430e-14, 2.3048642888941755e-16, 9.3368812560736470e-19, 4.7320526471236940e-22], [-1.1931277784927985e-11, -7.3998078230166529e-12, -2.8141910839281617e-12, -6.4053075817037017e-13, -8.3756931941719721e-14, -5.8971571660408407e-15, -2.0157248894686524e-16, -2.8069988286477814e-18, -1.1378096213150433e-20, -5.7732418214347544e-24], [1.4778949799654096e-13, 9.1682899271267321e-14, 3.4886035827657156e-14, 7.9470100102405274e-15, 1.0404364408591533e-15, 7.3381161393086760e-17, 2.5143503305745166e-18, 3.5137157500696389e-20, 1.4321412308988974e-22, 7.3413319943450351e-26], [-1.8516001357439885e-15, -1.1508349419894809e-15, -4.3961218524249114e-16, -1.0076275778807719e-16, -1.3309833818600088e-17, -9.5042654076356393e-19, -3.3130646423034186e-20, -4.7447577148233390e-22, -2.0072065980302934e-24, -1.0988449145513749e-27], [2.3203315173404840e-17, 1.4595419356730618e-17, 5.7119249528802783e-18, 1.3585255754570438e-18, 1.8878120357537061e-19, 1.4400776779857233e-20, 5.4604730597982409e-22, 8.7045823876980881e-24, 4.2371223882903585e-26, 2.8361028559078127e-29], [-2.7814360371908656e-19, -1.8720659199781725e-19, -8.2781809028505996e-20, -2.3047129512577218e-20, -3.8163267177598227e-21, -3.4880434779379284e-22, -1.5821502304731849e-23, -3.0043421753589447e-25, -1.7372943703650773e-27, -1.3906108988395299e-30], [2.4607823765891507e-21, 2.4584005522074171e-21, 1.6701140587310343e-21, 6.4728615028177119e-22, 1.3571968343537851e-22, 1.4666324281153371e-23, 7.5094304933916711e-25, 1.5612652701717034e-26, 9.6977038370552534e-29, 8.2677774675506575e-32], [2.8936299949998750e-23, -3.4676809653633504e-23, -5.4718735057434036e-23, -2.7566162458227295e-23, -6.4996156299634059e-24, -7.4809105033865704e-25, -3.9815192033568216e-26, -8.5031662029862367e-28, -5.3973264488321029e-30, -4.7066270274643472e-33], [-3.3301824532361206e-24, 5.9185564269776455e-25, 2.3239934536363315e-24, 1.2938150407148010e-24, 3.1603554685929566e-25, 3.7032913101082294e-26, 1.9940018062938141e-27, 4.2991261712865609e-29, 2.7564008456144797e-31, 2.4397046912847040e-34], [1.7139979544230098e-25, -1.3805854702272928e-26, -1.0021821003695349e-25, -5.7476366815697753e-26, -1.4188813435709546e-26, -1.6731680095909384e-27, -9.0575734042884868e-29, -1.9645789828452584e-30, -1.2701109065581738e-32, -1.1411293979778708e-35]],
        [[5.2345243467965712e-2, 3.2463611967879318e-2, 1.2345290085313138e-2, 2.8095847316744838e-3, 3.6733029897724613e-4, 2.5857447665623263e-5, 8.8357449848149419e-7, 1.2298830546584296e-8, 4.9818870540938479e-11, 2.5246025167755197e-14], [-6.7121700178953558e-4, -4.1627714094192353e-4, -1.5830222669305599e-4, -3.6026980011076226e-5, -4.7102339326902516e-6, -3.3156706038597586e-7, -1.1329973589538126e-8, -1.5770648151228708e-10, -6.3882161471571108e-13, -3.2372686089511691e-16], [6.4551150210172594e-6, 4.0033503620805894e-6, 1.5223974969336161e-6, 3.4647260151205487e-7, 4.5298468228341604e-8, 3.1886908865563402e-9, 1.0896071432139704e-10, 1.5166682330881986e-12, 6.1435678035174992e-15, 3.1132915978855006e-18], [-6.8976478672471195e-8, -4.2778016158135488e-8, -1.6267661004935145e-8, -3.7022519374891120e-9, -4.8403929181778253e-10, -3.4072936218573528e-11, -1.1643060026182784e-12, -1.6206448894868034e-14, -6.5647478538549120e-17, -3.3267288878516409e-20], [7.7390326505728413e-10, 4.7996148773948063e-10, 1.8252024898016957e-10, 4.1538633553950316e-11, 5.4308434603728640e-12, 3.8229342699463648e-13, 1.3063370651566645e-14, 1.8183487676186977e-16, 7.3656186541005094e-19, 3.7326041468845849e-22], [-8.9311130388664672e-12, -5.5389363668331091e-12, -2.1063632247549903e-12, -4.7937783249587939e-13, -6.2675547350635066e-14, -4.4119932224533828e-15, -1.5076595119116046e-16, -2.0986481596095286e-18, -8.5014680037796046e-21, -4.3086077622667287e-24], [1.0497470633724774e-13, 6.5105222654980997e-14, 2.4759629702044395e-14, 5.6353751331849371e-15, 7.3687237880496918e-16, 5.1879771772867691e-17, 1.7732231257258952e-18, 2.4691056164914534e-20, 1.0007154486835080e-22, 5.0763210792946246e-26], [-1.2496826543283886e-15, -7.7520151954247708e-16, -2.9492794974517343e-16, -6.7169045990495242e-17, -8.7909637924362535e-18, -6.1972704243320607e-19, -2.1220184569843886e-20, -2.9624944358126248e-22, -1.2055449543801027e-24, -6.1607140362462491e-28], [1.5004174722467266e-17, 9.3198023784163204e-18, 3.5555256615806124e-18, 8.1329619966283685e-19, 1.0711345261302231e-19, 7.6174395918515677e-21, 2.6402303467039419e-22, 3.7504616964190418e-24, 1.5669694412133548e-26, 8.3900276115999464e-30], [-1.8035102169070767e-19, -1.1293344970097516e-19, -4.3798522070406943e-20, -1.0276275710578019e-20, -1.4021732673810229e-21, -1.0452106706813231e-22, -3.8524676975289769e-24, -5.9327937590627872e-26, -2.7664905831509928e-28, -1.7468999642562103e-31], [2.1092555269601262e-21, 1.3800930411621485e-21, 5.8148481445811381e-22, 1.5286695350531345e-22, 2.3894290303101726e-23, 2.0705614055201466e-24, 8.9565441550249049e-26, 1.6302639708485891e-27, 9.0616014949725431e-30, 6.9503661796883358e-33], [-2.0737576321658071e-23, -1.7144933675235697e-23, -9.8945722740040709e-24, -3.4758645978290118e-24, -6.8780492534292616e-25, -7.1669965059274419e-26, -3.5783026488823294e-27, -7.2934624757160768e-29, -4.4462587065484674e-31, -3.7012537023591081e-34], [-9.6995801281637401e-27, 2.2375984638066672e-25, 2.6621958026409373e-25, 1.2635798070891704e-25, 2.9081064969833612e-26, 3.3017544552627765e-27, 1.7396319164560035e-28, 3.6797028367563513e-30, 2.3082646877528814e-32, 1.9737268550386574e-35], [1.2520659419649110e-26, -3.3675697269781652e-27, -1.0065273504941195e-26, -5.4842208820044596e-27, -1.3280791392969407e-27, -1.5468888413469931e-28, -8.2795687469174966e-30, -1.7719432407148283e-31, -1.1237124340167668e-33, -9.7439586272545780e-37]],
        [[5.1051969445165633e-2, 3.1661545853307829e-2, 1.2040279698239063e-2, 2.7401693902264206e-3, 3.5825480898002162e-4, 2.5218597539977275e-5, 8.6174435937757627e-7, 1.1994968017577176e-8, 4.8588014652661281e-11, 2.4622281224859809e-14], [-6.2268919220667287e-4, -3.8618103524112568e-4, -1.4685725390705733e-4, -3.3422292668925064e-5, -4.3696922965963649e-6, -3.0759534454241777e-7, -1.0510836406055066e-8, -1.4630457995853983e-10, -5.9263593404414059e-13, -3.0032197727855251e-16], [5.6962105551836853e-6, 3.5326909745214706e-6, 1.3434147410669037e-6, 3.0573907289574049e-7, 3.9972891300024999e-8, 2.8138080305066071e-9, 9.6150596626944104e-11, 1.3383590150260714e-12, 5.4212906102954504e-15, 2.7472730291374336e-18], [-5.7897109827223951e-8, -3.5906783210162255e-8, -1.3654662212919338e-8, -3.1075762759634060e-9, -4.0629026588670607e-10, -2.8599953181163604e-11, -9.7728862624853323e-13, -1.3603275533613572e-14, -5.5102786627018785e-17, -2.7923683705388074e-20], [6.1789757402815032e-10, 3.8320936288043030e-10, 1.4572718859902176e-10, 3.3165110139998161e-11, 4.3360681029878829e-12, 3.0522847170954508e-13, 1.0429959541369702e-14, 1.4517885224965902e-16, 5.8807613389527597e-19, 2.9801143541428386e-22], [-6.7828187488597582e-12, -4.2065873998469693e-12, -1.5996853341860699e-12, -3.6406228655060718e-13, -4.7598222560670730e-14, -3.3505818363536567e-15, -1.1449290452655491e-16, -1.5936773335547752e-18, -6.4555351459410513e-21, -3.2714069441734002e-24], [7.5835400867468848e-14, 4.7031903691288232e-14, 1.7885413809075007e-14, 4.0704549637455396e-15, 5.3218433624110318e-16, 3.7462546562810168e-17, 1.2801580961137541e-18, 1.7819554544833981e-20, 7.2184866270160529e-23, 3.6583032023288450e-26], [-8.5887772647557784e-16, -5.3267154306552834e-16, -2.0257301493141324e-16, -4.6105248836231736e-17, -6.0284461354276159e-18, -4.2441504307728651e-19, -1.4505315642237440e-20, -2.0195801073571628e-22, -8.1839875099784568e-25, -4.1502723871025817e-28], [9.8197600156477203e-18, 6.0909651349352820e-18, 2.3170003238385270e-18, 5.2757200045336587e-19, 6.9025100245687078e-20, 4.8637434117134919e-21, 1.6643167405242662e-22, 2.3212949154134606e-24, 9.4320028777184670e-27, 4.8064745930938773e-30], [-1.1302675513329572e-19, -7.0168477481818777e-20, -2.6739714002637802e-20, -6.1057374109704754e-21, -8.0210523689451314e-22, -5.6840635210383816e-23, -1.9604268598532971e-24, -2.7652381834420840e-26, -1.1429757452491582e-28, -6.0035946473045010e-32], [1.3035585284887793e-21, 8.1335879246115083e-22, 3.1316834699107156e-22, 7.2668355730154284e-23, 9.7656100803185948e-24, 7.1361791795105525e-25, 2.5643362539181982e-26, 3.8232091917592165e-28, 1.7086717309857096e-30, 1.0151362094677659e-33], [-1.4807773020233878e-23, -9.4882340646368669e-24, -3.8478646322859705e-24, -9.6240681964701960e-25, -1.4228880328198182e-25, -1.1647001359720684e-26, -4.7654881674183957e-28, -8.2234552411128747e-30, -4.3388969897550991e-32, -3.1473967530554154e-35], [1.5289741508038912e-25, 1.1192399375001164e-25, 5.6019287898247498e-26, 1.7621201600577170e-26, 3.2302297917405369e-27, 3.1934019117243999e-28, 1.5353736202304864e-29, 3.0396774577517899e-31, 1.8066073233064754e-33, 1.4624245831098439e-36], [-7.9710168432019559e-28, -1.3666169974841293e-27, -1.2053829848781758e-27, -5.2299364995871241e-28, -1.1574927008279031e-28, -1.2857804076542075e-29, -6.6752602903938533e-31, -1.3948614121619259e-32, -8.6368817697551063e-35, -7.2475745920976535e-38]],
        [[4.9850072876331842e-2, 3.0916150450571120e-2, 1.1756820097867019e-2, 2.6756586529534303e-3, 3.4982055599501394e-4, 2.4624885951888755e-5, 8.4145664863857133e-7, 1.1712575172393516e-8, 4.7444126008723149e-11, 2.4042608478757110e-14], [-5.7974020646029908e-4, -3.5954481931525103e-4, -1.3672801096528288e-4, -3.1117043775026625e-5, -4.0682997968700380e-6, -2.8637945026158778e-7, -9.7858683661320928e-9, -1.3621345680849940e-10, -5.5175982342000252e-13, -2.7960775178746841e-16], [5.0565861710502159e-6, 3.1360070268836004e-6, 1.1925634305553114e-6, 2.7140779867547880e-7, 3.5484357068600024e-8, 2.4978470559523630e-9, 8.5353898355684375e-11, 1.1880754075626840e-12, 4.8125368262003010e-15, 2.4387832266011656e-18], [-4.9004692813326215e-8, -3.0391860402052144e-8, -1.1557442631831746e-8, -2.6302836253637219e-9, -3.4388814114450351e-10, -2.4207286032751729e-11, -8.2718684781891628e-13, -1.1513948056092149e-14, -4.6639547238595811e-17, -2.3634883185218283e-20], [4.9866253319498651e-10, 3.0926185313135466e-10, 1.1760636189358400e-10, 2.6765271416600835e-11, 3.4993410552887579e-12, 2.4632879201358200e-13, 8.4172979378346599e-15, 1.1716377346206453e-16, 4.7459528424477787e-19, 2.4050414587121040e-22], [-5.2192729948541776e-12, -3.2369026201373104e-12, -1.2309321299691126e-12, -2.8013989615757090e-13, -3.6626010133836486e-14, -2.5782115794842641e-15, -8.8100045020258072e-17, -1.2263003620098129e-18, -4.9673760416271228e-21, -2.5172502090727363e-24], [5.5639346721748927e-14, 3.4506563400005308e-14, 1.3122189898967532e-14, 2.9863959542578675e-15, 3.9044722970152104e-16, 2.7484745476211592e-17, 9.3918228519609114e-19, 1.3072885803180968e-20, 5.2954507590870939e-23, 2.6835181528222344e-26], [-6.0083788584777945e-16, -3.7262982863017509e-16, -1.4170445580977061e-16, -3.2249768537129669e-17, -4.2164259670582062e-18, -2.9680958450144802e-19, -1.0142423649101031e-20, -1.4117941535087596e-22, -5.7189339248689263e-25, -2.8982662963131707e-28], [6.5506503886518936e-18, 4.0626533518484602e-18, 1.5449913533505366e-18, 3.5162974215019338e-19, 4.5975580766895164e-20, 3.2366354244492870e-21, 1.1061237313468604e-22, 1.5399236800081895e-24, 6.2394058228127260e-27, 3.1633310787971905e-30], [-7.1942947156006950e-20, -4.4622036472962725e-20, -1.6972256587446102e-20, -3.8638136374989290e-21, -5.0539016276946257e-22, -3.5598298294444246e-23, -1.2174970428200179e-24, -1.6968122006966174e-26, -6.8864621306382716e-29, -3.5016953941970716e-32], [7.9444474557114786e-22, 4.9300433485968603e-22, 1.8771840419367698e-22, 4.2807557560375345e-23, 5.6129841955797333e-24, 3.9671341579508266e-25, 1.3632434365364493e-26, 1.9128125697438837e-28, 7.8431210748364941e-31, 4.0610440697724847e-34], [-8.7950896818716579e-24, -5.4740055840595076e-24, -2.0969314073328059e-24, -4.8273890204319409e-25, -6.4157155426092079e-26, -4.6190340799629904e-27, -1.6275617391687041e-28, -2.3640763601937650e-30, -1.0192058014589395e-32, -5.7303618974960815e-36], [9.6664648743067124e-26, 6.1079006527330371e-26, 2.4116083605087126e-26, 5.8092932047137368e-27, 8.2031541317902350e-28, 6.3745694910435044e-29, 2.4660995569032465e-30, 4.0114235070882619e-32, 1.9880737127016891e-34, 1.3435571523529136e-37], [-1.0161514535378158e-27, -6.8785853574896440e-28, -3.0943421177341162e-28, -8.7356660576935282e-29, -1.4661719480631149e-29, -1.3517483230743313e-30, -6.1507453071021420e-32, -1.1651231320927469e-33, -6.6776081934228270e-36, -5.2053929957816630e-39]],
        [[4.8729273768497649e-2, 3.0221050286352095e-2, 1.1492486813754334e-2, 2.6155007503052413e-3, 3.4195540065142909e-4, 2.4071234801290115e-5, 8.2253784257352290e-7, 1.1449236664619649e-8, 4.6377420765692906e-11, 2.3502048905255477e-14], [-5.4151159482377769e-4, -3.3583609752854109e-4, -1.2771203799533396e-4, -2.9065156794440593e-5, -3.8000323018373256e-6, -2.6749532136577093e-7, -9.1405790501003229e-9, -1.2723141402082339e-10, -5.1537626441877330e-13, -2.6117015502377841e-16], [4.5131770949851971e-6, 2.7989941443977040e-6, 1.0644038837657990e-6, 2.4224079624668826e-7, 3.1671009279978014e-8, 2.2294144187239334e-9, 7.6181290296053995e-11, 1.0603981687797335e-12, 4.2953546592983534e-15, 2.1766979189866182e-18], [-4.1793944704836925e-8, -2.5919879508048068e-8, -9.8568339167528016e-9, -2.2432530855139352e-9, -2.9328705317402942e-10, -2.0645328331807197e-11, -7.0547123842863850e-13, -9.8197392887342323e-15, -3.9776816059598167e-17, -2.0157151066039784e-20], [4.0638082186885486e-10, 2.5203033626645006e-10, 9.5842311539326745e-11, 2.1812131861157776e-11, 2.8517584217858407e-12, 2.0074356616374273e-13, 6.8596057194344345e-15, 9.5481624438019585e-17, 3.8676739829501451e-19, 1.9599680573443571e-22], [-4.0643142267967210e-12, -2.5206171823530691e-12, -9.5854245676491241e-13, -2.1814847937176281e-13, -2.8521135383980016e-14, -2.0076856500671814e-15, -6.8604600088641687e-17, -9.5493516703576032e-19, -3.8681557674546117e-21, -1.9602122609463670e-24], [4.1400934934024044e-14, 2.5676141962621363e-14, 9.7641454274010226e-15, 2.2221587952000894e-15, 2.9052916238170543e-16, 2.0451193913388016e-17, 6.9883754611590547e-19, 9.7274036659097796e-21, 3.9402800798710913e-23, 1.9967624043687233e-26], [-4.2720544456696338e-16, -2.6494543743209042e-16, -1.0075370185581464e-16, -2.2929892266610913e-17, -2.9978981458008377e-18, -2.1103092873021414e-19, -7.2111427280104917e-21, -1.0037496142475453e-22, -4.0658975847522276e-25, -2.0604272151043450e-28], [4.4506043270849339e-18, 2.7601904969141681e-18, 1.0496498709080346e-18, 2.3888384256902187e-19, 3.1232268638489337e-20, 2.1985452223037333e-21, 7.5127170795769254e-23, 1.0457394967509105e-24, 4.2360625298500228e-27, 2.1467270901971502e-30], [-4.6709349895995099e-20, -2.8968564757255853e-20, -1.1016375762053741e-20, -2.5072123476986497e-21, -3.2781012384659181e-22, -2.3076736542004478e-23, -7.8861310255840168e-25, -1.0978176852175266e-26, -4.4476358046666657e-29, -2.2544948937964441e-32], [4.9308225346865509e-22, 3.0581828178402550e-22, 1.1631034590842775e-22, 2.6475181837391955e-23, 3.4623307531080455e-24, 2.4381339193253073e-25, 8.3356105509521422e-27, 1.1611133675776287e-28, 4.7085221879677696e-31, 2.3907223529821141e-34], [-5.2288884978745380e-24, -3.2440015405346106e-24, -1.2345211330909233e-24, -2.8127699800950449e-25, -3.6835103243906712e-26, -2.5988619728015008e-27, -8.9087887601846505e-29, -1.2456595280175429e-30, -5.0803978449259248e-33, -2.6056485581144280e-36], [5.5605762785690080e-26, 3.4553121898415601e-26, 1.3193099950741567e-26, 3.0217669144537831e-27, 3.9869237049772534e-28, 2.8421869884367253e-29, 9.8816714118017090e-31, 1.4092860712686306e-32, 5.9184776150816400e-35, 3.1888966397973607e-38], [-5.9298392509425878e-28, -3.7244799827840967e-28, -1.4456580428268989e-28, -3.3869954267692326e-29, -4.6399504220177286e-30, -3.4512664603419266e-31, -1.2750258084951122e-32, -1.9588102006573793e-34, -9.1107371867024281e-37, -5.6628472798314893e-40]],
        [[4.7680841987653452e-2, 2.9570831082978996e-2, 1.1245220899763586e-2, 2.5592271000458641e-3, 3.3459807964193671e-4, 2.3553331585869098e-5, 8.0484057872349945e-7, 1.1202901296630756e-8, 4.5379590137735274e-11, 2.2996391975002673e-14], [-5.0730759791585418e-4, -3.1462337198168744e-4, -1.1964524460724569e-4, -2.7229287456408879e-5, -3.5600073525203824e-6, -2.5059926737109497e-7, -8.5632242149405047e-9, -1.1919497872864399e-10, -4.8282307751909780e-13, -2.4467362335151406e-16], [4.0481442912317157e-6, 2.5105888664159220e-6, 9.5472887833662955e-7, 2.1728057104568865e-7, 2.8407663319167778e-8, 1.9996980091820485e-9, 6.8331653936719061e-11, 9.5113590781267592e-13, 3.8527660397050876e-15, 1.9524133595772510e-18], [-3.5891951114300726e-8, -2.2259565464774063e-8, -8.4648865661509158e-9, -1.9264687898995229e-9, -2.5187008905129933e-10, -1.7729867817361519e-11, -6.0584707614783195e-13, -8.4330303098241030e-15, -3.4159674261815483e-17, -1.7310629220828104e-20], [3.3413890147076451e-10, 2.0722715039803627e-10, 7.8804517740233790e-11, 1.7934610552069600e-11, 2.3448041206828990e-12, 1.6505757898777586e-13, 5.6401803250294408e-15, 7.8507949461962907e-17, 3.1801213587838441e-19, 1.6115464481055381e-22], [-3.1995674129547451e-12, -1.9843162068546245e-12, -7.5459746197555841e-13, -1.7173395630825937e-13, -2.2452814759779802e-14, -1.5805189074484241e-15, -5.4007890483217595e-17, -7.5175765580312295e-19, -3.0451445956916489e-21, -1.5431461292827868e-24], [3.1205008249867395e-14, 1.9352804818959508e-14, 7.3595011565256246e-15, 1.6749012772834666e-15, 2.1897968840321024e-16, 1.5414616969380686e-17, 5.2673267386290915e-19, 7.3318050380133366e-21, 2.9698941674493932e-23, 1.5050125353992758e-26], [-3.0829120851693622e-16, -1.9119686116760652e-16, -7.2708506882555551e-17, -1.6547259303242078e-17, -2.1634193373209897e-18, -1.5228938476938606e-19, -5.2038789081214049e-21, -7.2434901088959656e-23, -2.9341208455074376e-25, -1.4868845313346254e-28], [3.0750619192591694e-18, 1.9071002060713401e-18, 7.2523381007057322e-19, 1.6505131389247198e-19, 2.1579121482468879e-20, 1.5190178522147012e-21, 5.1906374297948255e-23, 7.2250650010725665e-25, 2.9266611648873672e-27, 1.4831075840876174e-30], [-3.0899503364518219e-20, -1.9163348178499267e-20, -7.2874639724528313e-21, -1.6585102303877689e-21, -2.1683733711326933e-22, -1.5263873532166854e-23, -5.2158458915719290e-25, -7.2602050901475600e-27, -2.9409265661483924e-29, -1.4903639929442444e-32], [3.1231647748328864e-22, 1.9369417061661189e-22, 7.3658897286311963e-23, 1.6763807960480823e-23, 2.1917793626768686e-24, 1.5429042400383959e-25, 5.2724781795542304e-27, 7.3394130442690584e-29, 2.9732421930870319e-31, 1.5069432535343506e-34], [-3.1717734923997823e-24, -1.9671393900830951e-24, -7.4811334462856042e-25, -1.7027555595794600e-25, -2.2265383125603007e-26, -1.5676435015829000e-27, -5.3582929724299249e-29, -7.4613881914005350e-31, -3.0241922172634440e-33, -1.5341314629879308e-36], [3.2336986226819716e-26, 2.0058295803045272e-26, 7.6313347460939761e-27, 1.7377531623375620e-27, 2.2740742475114341e-28, 1.6026997461564801e-29, 5.4862693836331646e-31, 7.6554439038383161e-33, 3.1121501563865130e-35, 1.5866708731990837e-38], [-3.3523771111517212e-28, -2.1035821245831017e-28, -7.9069218946527487e-29, -1.8060160433927026e-29, -2.3797890924245479e-30, -1.6927548546917812e-31, -5.8063778557737056e-33, -8.1733801490317682e-35, -3.3821701299328763e-37, -1.7722021492821058e-40]],
        [[4.6697309158796671e-2, 2.8960861083828826e-2, 1.1013260987530330e-2, 2.5064368437402641e-3, 3.2769618399408940e-4, 2.3067487085689128e-5, 7.8823879280336768e-7, 1.0971814328692318e-8, 4.4443526200943107e-11, 2.2522035702969337e-14], [-4.7655898423378833e-4, -2.9555361517110944e-4, -1.1239338120043208e-4, -2.5578882762541227e-5, -3.3442303934571307e-6, -2.3541009990532222e-7, -8.0441953765397715e-9, -1.1197040655817681e-10, -4.5355850441115636e-13, -2.2984361734818139e-16], [3.6475307430569816e-6, 2.2621352932660136e-6, 8.6024674134269045e-7, 1.9577799251739422e-7, 2.5596376472920164e-8, 1.8018033549642246e-9, 6.1569398353198768e-11, 8.5700933933748906e-13, 3.4714875668004902e-15, 1.7591981016176977e-18], [-3.1019715394439503e-8, -1.9237889389801124e-8, -7.3158010076374954e-9, -1.6649558389451382e-9, -2.1767940265626027e-10, -1.5323086001162206e-11, -5.2360496688312893e-13, -7.2882691522853518e-15, -2.9522590460002728e-17, -1.4960757915072849e-20], [2.7699094938153038e-10, 1.7178498185493043e-10, 6.5326539616036944e-11, 1.4867244674687013e-11, 1.9437710383859724e-12, 1.3682769441822553e-13, 4.6755373166498209e-15, 6.5080693558398783e-17, 2.6362235293980344e-19, 1.3359228109403133e-22], [-2.5440615645780903e-12, -1.5777828506167807e-12, -6.0000060997197802e-13, -1.3655025853099427e-13, -1.7852833099088856e-14, -1.2567128244995297e-15, -4.2943117125546263e-17, -5.9774260302537224e-19, -2.4212758477957213e-21, -1.2269967250054617e-24], [2.3798987265174865e-14, 1.4759719062399714e-14, 5.6128385713916198e-15, 1.2773896315815047e-15, 1.6700828065006302e-16, 1.1756198412999053e-17, 4.0172089895544153e-19, 5.5917155536952950e-21, 2.2650361141526587e-23, 1.1478212613304557e-26], [-2.2552419771460394e-16, -1.3986619533629162e-16, -5.3188436275303429e-17, -1.2104812254882449e-17, -1.5826055236374260e-18, -1.1140420421132642e-19, -3.8067915902324705e-21, -5.2988271025035600e-23, -2.1463958134485008e-25, -1.0876995606547980e-28], [2.1576635731519400e-18, 1.3381455261759906e-18, 5.0887112905308839e-19, 1.1581069128356343e-19, 1.5141304126011788e-20, 1.0658404528208978e-21, 3.6420821545951892e-23, 5.0695616762411450e-25, 2.0535274481608409e-27, 1.0406380858508430e-30], [-2.0795980752704054e-20, -1.2897307109071942e-20, -4.9045994273821400e-21, -1.1162062315773360e-21, -1.4593489635283456e-22, -1.0272784664576577e-23, -3.5103133031776835e-25, -4.8861497499642892e-27, -1.9792342662923856e-29, -1.0029908307530228e-32], [2.0161467703413579e-22, 1.2503796827546719e-22, 4.7549580772722898e-23, 1.0821514272174219e-23, 1.4148271465827542e-24, 9.9594026789618852e-26, 3.4032370226944311e-27, 4.7371244828654191e-29, 1.9188797784777736e-31, 9.7241549072284502e-35], [-1.9639778891374031e-24, -1.2180291858761701e-24, -4.6319574649806002e-25, -1.0541654103567496e-25, -1.3782515953047424e-26, -9.7020666137750837e-28, -3.3153663950398102e-29, -4.6149338602306152e-31, -1.8694600354125552e-33, -9.4743734655714553e-37], [1.9209946333489469e-26, 1.1915814407372778e-26, 4.5307169581227892e-27, 1.0312120055966447e-27, 1.3483490567224878e-28, 9.4931150455215842e-30, 3.2442375892218362e-31, 4.5159671772150313e-33, 1.8297304254518169e-35, 9.2756541612622627e-39], [-1.9166502636494798e-28, -1.1863904542448860e-28, -4.5472196465239752e-29, -1.0294810898157691e-29, -1.3479308547917066e-30, -9.5539881884066807e-32, -3.2730061677661206e-33, -4.5471480045094144e-35, -1.8432696014568236e-37, -9.3443386053056487e-41]],
        [[4.5772243441016391e-2, 2.8387151372741536e-2, 1.0795090168610411e-2, 2.4567847580057104e-3, 3.2120457856497344e-4, 2.2610524106821413e-5, 7.7262391696186429e-7, 1.0754464561004221e-8, 4.3563107538575333e-11, 2.2075878022821385e-14], [-4.4879601855686219e-4, -2.7833550546139603e-4, -1.0584566373456957e-4, -2.4088730089557162e-5, -3.1494050796954752e-6, -2.2169577966397518e-7, -7.5755635229268689e-9, -1.0544733038722979e-10, -4.2713548101418780e-13, -2.1645358448633584e-16], [3.3003011890350248e-6, 2.0467895472395441e-6, 7.7835487712363120e-7, 1.7714075274675521e-7, 2.3159709310021461e-8, 1.6302792693700403e-9, 5.5708251117558038e-11, 7.7542566214510962e-13, 3.1410165812145397e-15, 1.5917298565799085e-18], [-2.6965891140713677e-8, -1.6723777909176294e-8, -6.3597325465608252e-9, -1.4473704009268827e-9, -1.8923188046580041e-10, -1.3320582210149463e-11, -4.5517743661294841e-13, -6.3357987030374904e-15, -2.5664418593557369e-17, -1.3005605118879858e-20], [2.3134756309329897e-10, 1.4347774545303321e-10, 5.4561839580766476e-11, 1.2417376210581413e-11, 1.6234707088627451e-12, 1.1428082303016336e-13, 3.9050884758819034e-15, 5.4356504761858159e-17, 2.2018188343364841e-19, 1.1157855066270388e-22], [-2.0414999042136596e-12, -1.2661028267718685e-12, -4.8147466430408301e-13, -1.0957570508011259e-13, -1.4326130140850091e-14, -1.0084579502405810e-15, -3.4460003135104763e-17, -4.7966271086541440e-19, -1.9429696510887714e-21, -9.8461205922291189e-25], [1.8348587142526489e-14, 1.1379475453576949e-14, 4.3273966443659272e-15, 9.8484421637593782e-16, 1.2876035250795545e-16, 9.0638155515681093e-18, 3.0971952004057273e-19, 4.3111111746707353e-21, 1.7463017210783355e-23, 8.8494935202656066e-27], [-1.6705508862764932e-16, -1.0360466807184939e-16, -3.9398871662463053e-17, -8.9665344041638757e-18, -1.1723012752807293e-18, -8.2521694955179419e-20, -2.8198477358146555e-21, -3.9250600309079038e-23, -1.5899239924814298e-25, -8.0570395777264993e-29], [1.5355809214579145e-18, 9.5234065014439592e-19, 3.6215691605070615e-19, 8.2420950490117456e-20, 1.0775867369673343e-20, 7.5854463389909354e-22, 2.5920218619239708e-23, 3.6079400025047454e-25, 1.4614681965050415e-27, 7.4060818402087445e-31], [-1.4219712514325151e-20, -8.8188190597473336e-21, -3.3536280654055423e-21, -7.6323053067049599e-22, -9.9786171203718436e-23, -7.0242388339825075e-24, -2.4002517780439733e-25, -3.3410075845263348e-27, -1.3533419541632280e-29, -6.8581458944157385e-33], [1.3245125812026878e-22, 8.2143973394422531e-23, 3.1237782116673648e-23, 7.1092053707343437e-24, 9.2947077368137021e-25, 6.5428159906619953e-26, 2.2357452770616780e-27, 3.1120252498681445e-29, 1.2605885700245310e-31, 6.3881167091204638e-35], [-1.2396335786194391e-24, -7.6880011605403396e-25, -2.9236002886339770e-25, -6.6536291683292049e-26, -8.6990964999095033e-27, -6.1235477715183854e-28, -2.0924779175516909e-29, -2.9126146461316977e-31, -1.1798194353493443e-33, -5.9787882915454941e-37], [1.1648939945776134e-26, 7.2257545897962839e-27, 2.7476659234932394e-27, 6.2527967925197882e-28, 8.1748132472600292e-29, 5.7547199437564405e-30, 1.9662326078440000e-31, 2.7368799871325156e-33, 1.1088506431960927e-35, 5.6204912320778176e-39], [-1.1207459574889946e-28, -6.9194370829385893e-29, -2.6877617985030188e-29, -6.0555639577121866e-30, -7.9887574093182543e-31, -5.6182127806267652e-32, -1.9145377248501239e-33, -2.6448622893501469e-35, -1.0694899495427777e-37, -5.3784237286725322e-41]],
        [[4.4900071576025028e-2, 2.7846245511606267e-2, 1.0589394025766996e-2, 2.4099717031238059e-3, 3.1508415327509700e-4, 2.2179689577067791e-5, 7.5790187600571320e-7, 1.0549542522930172e-8, 4.2733029878176198e-11, 2.1655230961217396e-14], [-4.2362800042276082e-4, -2.6272673720328561e-4, -9.9909948010411192e-5, -2.2737858935060424e-5, -2.9727896890057649e-6, -2.0926330884843979e-7, -7.1507337289056379e-9, -9.9533952786616939e-11, -4.0318216349935972e-13, -2.0431509057308575e-16], [2.9976458584127231e-6, 1.8590879613381728e-6, 7.0697555772696334e-7, 1.6089599506603928e-7, 2.1035839676053163e-8, 1.4807739112175184e-9, 5.0599505522946229e-11, 7.0431496748206686e-13, 2.8529685039553896e-15, 1.4457596864617551e-18], [-2.3568539742425409e-8, -1.4616799505684193e-8, -5.5584889997760332e-9, -1.2650205638764039e-9, -1.6539112584929223e-10, -1.1642362181687620e-11, -3.9783100245740862e-13, -5.5375705091047090e-15, -2.2431035801195310e-17, -1.1367068105374234e-20], [1.9456915984929024e-10, 1.2066841775466847e-10, 4.5887888962892918e-11, 1.0443327885199676e-11, 1.3653799834318282e-12, 9.6113066533116292e-14, 3.2842783115155425e-15, 4.5715197179706611e-17, 1.8517854046476043e-19, 9.3840387032175779e-23], [-1.6521505800372961e-12, -1.0246351299454782e-12, -3.8964912232471241e-13, -8.8677723830528271e-14, -1.1593889459900724e-14, -8.1612758540394481e-16, -2.7887884809589176e-17, -3.8818273972863771e-19, -1.5724117495107650e-21, -7.9682951803018343e-25], [1.4288745085078953e-14, 8.8616318354463279e-15, 3.3699089228290105e-15, 7.6693577804021816e-16, 1.0027060065772199e-16, 7.0583390918890905e-18, 2.4119041074248139e-19, 3.3572268057506559e-21, 1.3599117979426970e-23, 6.8914383453284298e-27], [-1.2518213941342425e-16, -7.7635791334506145e-17, -2.9523405035113986e-17, -6.7190408196894976e-18, -8.7845981127755476e-19, -6.1837340017790138e-20, -2.1130429190440801e-21, -2.9412298390390183e-23, -1.1914039146344336e-25, -6.0375140762103097e-29], [1.1072522516896947e-18, 6.8669863905084687e-19, 2.6113834495692311e-19, 5.9430787111837670e-20, 7.7700909156048650e-21, 5.4695928920756021e-22, 1.8690138562233927e-23, 2.6015559244824213e-25, 1.0538122088951842e-27, 5.3402594788519058e-31], [-9.8663356891692266e-21, -6.1189302453040025e-21, -2.3269120206683937e-21, -5.2956685859992954e-22, -6.9236549620054559e-23, -4.8737620218751269e-24, -1.6654125714409286e-25, -2.3181550731110228e-27, -9.3901503426991930e-30, -4.7585176195620353e-33], [8.8432597600938705e-23, 5.4844361255198095e-23, 2.0856260980147044e-23, 4.7465415082681185e-24, 6.2057161209947545e-25, 4.3683840814251091e-26, 1.4927199465773238e-27, 2.0777772389371920e-29, 8.4164521717249199e-32, 4.2650902705123772e-35], [-7.9641717844329381e-25, -4.9392550610790226e-25, -1.8782978185898972e-25, -4.2747046533699774e-26, -5.5888094430860957e-27, -3.9341265366146709e-28, -1.3443339226835173e-29, -1.8712397674452530e-31, -7.5798297574248351e-34, -3.8411093099096992e-37], [7.2053146402699324e-27, 4.4684603372187845e-27, 1.6990725652282094e-27, 3.8671088518084314e-28, 5.0555991199583979e-29, 3.5592285903672911e-30, 1.2159324312282664e-31, 1.6922551016649174e-33, 6.8546014332324640e-36, 3.4782694169839171e-39], [-6.9673322093270078e-29, -4.4345252314924021e-29, -1.6766815936416238e-29, -3.7919909807889485e-30, -4.9545923483607633e-31, -3.5815418644372632e-32, -1.1792021958603098e-33, -1.6900250209536431e-35, -6.9020935041027395e-38, -3.2824015228344515e-41]],
    ],
    [
        [[1.3483943323955985e-1, 1.2698094772763807e-1, 1.1306647102664064e-1, 9.5880153408547455e-2, 7.8099664214016646e-2, 6.1555858583967127e-2, 4.7070349649979350e-2, 3.4699949021387612e-2, 2.4091387637908464e-2, 1.4752906559025517e-2, 6.2028450200716427e-3], [-4.3330609406685884e-3, -9.2091005531789259e-3, -1.7054025100464403e-2, -2.5071772507951298e-2, -3.0865036815226501e-2, -3.3197204400740283e-2, -3.1995742170393726e-2, -2.7898866813098769e-2, -2.1762888014108519e-2, -1.4358097505270767e-2, -6.2783399169000406e-3], [7.7885369831197024e-5, 3.3985023880968134e-4, 1.0020847476875365e-3, 2.1478485718855514e-3, 3.6248401935560276e-3, 5.0523936207812356e-3, 5.9926003960138502e-3, 6.1351612453867122e-3, 5.3846517153249758e-3, 3.8445591684699068e-3, 1.7548596133523387e-3], [-1.4650182923495547e-6, -1.1247478381673031e-5, -4.8753196288719714e-5, -1.4400285654310244e-4, -3.1833733432893345e-4, -5.5592407348126010e-4, -7.9298291515450067e-4, -9.3945155647211852e-4, -9.1990110467764656e-4, -7.0766013139719744e-4, -3.3653787968341475e-4], [2.7756115650032725e-8, 3.4230506160403938e-7, 2.0866737227716282e-6, 8.1714281724042069e-6, 2.2916232582301689e-5, 4.8889274601081435e-5, 8.2283021913601516e-5, 1.1127017215559492e-4, 1.2043883087889472e-4, 9.9257372139913214e-5, 4.9036342855233596e-5], [-5.2133136415720633e-10, -9.7710966947909186e-9, -8.1031856185951490e-8, -4.0875941490409577e-7, -1.4193327180411318e-6, -3.6258195714112693e-6, -7.0867461939577592e-6, -1.0807499902721541e-5, -1.2819476828266359e-5, -1.1254315194253647e-5, -5.7585024098356512e-6], [9.6536917139289948e-12, 2.6480414999696089e-10, 2.9093829287094483e-9, 1.8479514284587866e-8, 7.7908383869852920e-8, 2.3441815369459512e-7, 5.2493914444723357e-7, 8.9328058789111788e-7, 1.1520586342289517e-6, 1.0717113208681796e-6, 5.6630820610114671e-7], [-1.7608456601111427e-13, -6.8686195509115370e-12, -9.7814980394095962e-11, -7.6771267253230633e-10, -3.8660913722168974e-9, -1.3510845289736949e-8, -3.4261232882942650e-8, -6.4448482065482109e-8, -8.9735288958211563e-8, -8.8026519997270390e-8, -4.7908406640461508e-8], [3.1651455252705304e-15, 1.7151126436302129e-13, 3.1074953965152921e-12, 2.9657874755487611e-11, 1.7591448833287294e-10, 7.0541264081055743e-10, 2.0049944618800358e-9, 4.1346004215835725e-9, 6.1755272717744789e-9, 6.3598993029419800e-9, 3.5563483197604461e-9], [-5.6130229830638553e-17, -4.1408154878359428e-15, -9.3919765840127117e-14, -1.0748493939302487e-12, -7.4176045314907620e-12, -3.3766894032485532e-11, -1.0659957280265459e-10, -2.3919008288211502e-10, -3.8103678286261577e-10, -4.1031755369399106e-10, -2.3520861409600008e-10], [9.8298689919587964e-19, 9.6988210885623155e-17, 2.7146469706353759e-15, 3.6793859322588639e-14, 2.9221555221607856e-13, 1.4957903526178348e-12, 5.2021471949285222e-12, 1.2615753466919156e-11, 2.1322964023648477e-11, 2.3921294643563964e-11, 1.4028270695543400e-11], [-1.7017420463472559e-20, -2.2098463908889559e-18, -7.5348704434206473e-17, -1.1960842630481306e-15, -1.0825130302288572e-14, -6.1773534429832561e-14, -2.3493931688282027e-13, -6.1203655392213777e-13, -1.0923334922664063e-12, -1.2723985459325464e-12, -7.6192640366920226e-13], [2.9144106991924296e-22, 4.9086826232726296e-20, 2.0151007477366469e-18, 3.7085047652802945e-17, 3.7908243069589914e-16, 2.3927992559211710e-15, 9.8851490240648535e-15, 2.7509316038756244e-14, 5.1619635497229044e-14, 6.2242340191853095e-14, 3.7992676651132819e-14], [-4.9400771668366779e-24, -1.0644353517387037e-21, -5.2036503254847554e-20, -1.0997817870413450e-18, -1.2591369793873091e-17, -8.7269393474730837e-17, -3.8915391300000260e-16, -1.1508488010095869e-15, -2.2611616637617899e-15, -2.8141771254876350e-15, -1.7481705473774638e-15]],
        [[1.2674557731363068e-1, 1.1091131516066650e-1, 8.5455049332578638e-2, 5.8686993231641411e-2, 3.6575957821517405e-2, 2.1158209934658387e-2, 1.1640467998049987e-2, 6.2191664480595680e-3, 3.2479264649567760e-3, 1.5979238741634057e-3, 5.8997008960979291e-4], [-3.7734673960043830e-3, -6.9499640117825018e-3, -1.0912367015871991e-2, -1.3073030357805022e-2, -1.2555859099967125e-2, -1.0181898175308401e-2, -7.2746998263174340e-3, -4.7309471687057577e-3, -2.8435379502679021e-3, -1.5334755959739284e-3, -5.9455028048728712e-4], [6.2662303991030317e-5, 2.3225620471156813e-4, 5.7404301897466517e-4, 9.9639214347025168e-4, 1.3184756653646839e-3, 1.4060245464808145e-3, 1.2621874436992773e-3, 9.8618201644397864e-4, 6.8142218846255400e-4, 4.0448281114854360e-4, 1.6537160092190923e-4], [-1.0932369673457914e-6, -7.0444336687632990e-6, -2.5300461413165867e-5, -6.0318553772051032e-5, -1.0505742382579851e-4, -1.4204941285713843e-4, -1.5600063683764300e-4, -1.4383752645423900e-4, -1.1301225444136902e-4, -7.3402218060734760e-5, -3.1563452881203958e-5], [1.9299124908963601e-8, 1.9756307326278235e-7, 9.8954954809642234e-7, 3.1228619291306037e-6, 6.9333176622123119e-6, 1.1574235453650618e-5, 1.5224389266868691e-5, 1.6302440781232920e-5, 1.4401172267153746e-5, 1.0161350407573300e-5, 4.5783863063549939e-6], [-3.3899001620762720e-10, -5.2184841414294977e-9, -3.5344671150873963e-8, -1.4362906676743515e-7, -3.9680365394708301e-7, -8.0106065276366557e-7, -1.2404102978185184e-6, -1.5214276920957880e-6, -1.4955344960177487e-6, -1.1383596581800413e-6, -5.3538759465247427e-7], [5.8842213344911547e-12, 1.3132052091496661e-10, 1.1732302663895994e-9, 6.0067481943054896e-9, 2.0255389160358928e-8, 4.8619570298895264e-8, 8.7348599443788481e-8, 1.2126032099428303e-7, 1.3141318154049216e-7, 1.0721193294832858e-7, 5.2443632324325373e-8], [-1.0079321717340791e-13, -3.1721435455134778e-12, -3.6622210435449651e-11, -2.3201968530797646e-10, -9.3975119526750107e-10, -2.6439333785574467e-9, -5.4427909696741291e-9, -8.4627047680907331e-9, -1.0027838737016463e-8, -8.7171966779893094e-9, -4.4202006736362523e-9], [1.7034526554737961e-15, 7.3951705716597938e-14, 1.0841361130491671e-12, 8.3700711691464691e-12, 4.0162401541264793e-11, 1.3081325968398327e-10, 3.0521971638036245e-10, 5.2661836425980860e-10, 6.7724827814547854e-10, 6.2397323783406267e-10, 3.2698334796340669e-10], [-2.8435134101056357e-17, -1.6706364608198906e-15, -3.0630121189797393e-14, -2.8434871034358034e-13, -1.5970021862635753e-12, -5.9566671091125995e-12, -1.5601130380537312e-11, -2.9623546845784540e-11, -4.1071494945283711e-11, -3.9912343768920602e-11, -2.1555499749401405e-11], [4.6908594200659591e-19, 3.6688236088552957e-17, 8.2996902251398201e-16, 9.1551509376037669e-15, 5.9541944498252550e-14, 2.5186428335656043e-13, 7.3409134661654135e-13, 1.5226148627157421e-12, 2.2621487618621307e-12, 2.3085034208179322e-12, 1.2816729626593590e-12], [-7.6569122517747480e-21, -7.8519631873658537e-19, -2.1652382505514761e-17, -2.8078162522641036e-16, -2.0942590894384526e-15, -9.9589188220234256e-15, -3.2049890997515438e-14, -7.2125966318477313e-14, -1.1420059099619692e-13, -1.2189527193875058e-13, -6.9411575817942947e-14], [1.2370748491087869e-22, 1.6410687999999165e-20, 5.4555906151369557e-19, 8.2364124191820973e-18, 6.9836378168009640e-17, 3.7036973808838326e-16, 1.3067265886560373e-15, 3.1710451932581103e-15, 5.3241971591054504e-15, 5.9224541713088902e-15, 3.4517213080703612e-15], [-1.9801287174012567e-24, -3.3538024650417919e-22, -1.3303163619826291e-20, -2.3170254397649711e-19, -2.2149964257966170e-18, -1.3003002207965357e-17, -4.9959265621542547e-17, -1.2997812181323795e-16, -2.3033078800828120e-16, -2.6609673562730241e-16, -1.5841832749397807e-16]],
        [[1.1966179245196558e-1, 9.8635071145533666e-2, 6.7421172599028417e-2, 3.8702111656858881e-2, 1.9039637926532262e-2, 8.2639738731256610e-3, 3.2873095135174398e-3, 1.2526210986824487e-3, 4.7591375613137367e-4, 1.8088314958323178e-4, 5.6955858866370057e-5], [-3.3198647425612964e-3, -5.3832621724066534e-3, -7.3105556216095758e-3, -7.3243031039812486e-3, -5.6322419342380949e-3, -3.5070972989492486e-3, -1.8644164754715576e-3, -8.9141389720447080e-4, -4.0073822930580535e-4, -1.7053999863693965e-4, -5.7093039832282282e-5], [5.1194918760964337e-5, 1.6372724677309378e-4, 3.4625510652102459e-4, 4.9799513603665500e-4, 5.2768326873138051e-4, 4.3651788125798693e-4, 2.9691696511530635e-4, 1.7452345747870389e-4, 9.2367989175483525e-5, 4.4151416843184866e-5, 1.5786568659099136e-5], [-8.3187603824115841e-7, -4.5731518244230256e-6, -1.3882153441812364e-5, -2.7265254988391610e-5, -3.8081805154108691e-5, -4.0283119447444894e-5, -3.4020888464444393e-5, -2.4057953740135239e-5, -1.4781641591676571e-5, -7.8733906651437442e-6, -2.9959318929777805e-6], [1.3731183075135064e-8, 1.1869423001146574e-7, 4.9781596416731660e-7, 1.2895533393402981e-6, 2.3004139019568460e-6, 3.0275864632628425e-6, 3.1027001173055048e-6, 2.5917249300305585e-6, 1.8236058576033892e-6, 1.0726132830326744e-6, 4.3224541651616968e-7], [-2.2630651721678972e-10, -2.9121177928640431e-9, -1.6400656120429908e-8, -5.4582469008718586e-8, -1.2146621694408776e-7, -1.9476084342522950e-7, -2.3778393186358014e-7, -2.3102347455911468e-7, -1.8389986497593248e-7, -1.1841837703370625e-7, -5.0293731024625330e-8], [3.6937252603983779e-12, 6.8276003507156646e-11, 5.0451885135735557e-10, 2.1129915699019734e-9, 5.7569055370999312e-9, 1.1055585900482839e-8, 1.5836672792505997e-8, 1.7661047542082525e-8, 1.5734140197066378e-8, 1.1004914484838482e-8, 4.9036071190883445e-9], [-5.9607646103458987e-14, -1.5406175465801991e-12, -1.4651632606565909e-11, -7.5913341694451110e-11, -2.4930066463261622e-10, -5.6523731727413466e-10, -9.3766502503904434e-10, -1.1865438750427381e-9, -1.1718213192221949e-9, -8.8394250382317384e-10, -4.1151034802663264e-10], [9.4990896443692246e-16, 3.3626386285106732e-14, 4.0487253078155210e-13, 2.5576506034471350e-12, 9.9898091455427983e-12, 2.6412042495193882e-11, 5.0166841244455992e-11, 7.1307510031099333e-11, 7.7404114495961253e-11, 6.2569644670628824e-11, 3.0318446304900307e-11], [-1.4972139744114080e-17, -7.1264364263715889e-16, -1.0708866414326983e-14, -8.1440964454373184e-14, -3.7392923017473645e-13, -1.1403603708603581e-12, -2.4551993442362693e-12, -3.8847877666063689e-12, -4.5996930706682002e-12, -3.9614586551827552e-12, -1.9911192574425937e-12], [2.3326675647096759e-19, 1.4708078972449764e-17, 2.7236449779347523e-16, 2.4656278349778822e-15, 1.3169902826252053e-14, 4.5879811493340821e-14, 1.1096453202011146e-13, 1.9386658401142971e-13, 2.4865905717124864e-13, 2.2697939649930097e-13, 1.1797207233936721e-13], [-3.6016762580033535e-21, -2.9631852981138040e-19, -6.6852390433327858e-18, -7.1311270417203678e-17, -4.3897859827251559e-16, -1.7316350955896884e-15, -4.6665842524109843e-15, -8.9364544526933220e-15, -1.2339381575935405e-14, -1.1881518468656743e-14, -6.3678413579268902e-15], [5.4999940374752179e-23, 5.8387155093583622e-21, 1.5882602726647667e-19, 1.9779011510585965e-18, 1.3912405291040493e-17, 6.1647250232308485e-17, 1.8374340796371740e-16, 3.8310505043606920e-16, 5.6624313454731518e-16, 5.7267066451311275e-16, 3.1567596372674213e-16], [-8.3475973456795734e-25, -1.1266072602227556e-22, -3.6593647694915502e-21, -5.2742978323230675e-20, -4.2051844625874261e-19, -2.0774280860994052e-18, -6.8005253400365303e-18, -1.5340863396740180e-17, -2.4141629904132971e-17, -2.5540587883593740e-17, -1.4445753195182194e-17]],
        [[1.1340243878508020e-1, 8.9024781018025587e-2, 5.5124053055905148e-2, 2.7203718801604849e-2, 1.0894317589851053e-2, 3.6433629671545499e-3, 1.0621567683579988e-3, 2.8654156946237994e-4, 7.6856208008709715e-5, 2.1613152300864700e-5, 5.5989106341601146e-6], [-2.9468158398687311e-3, -4.2645835161362184e-3, -5.0927062901731538e-3, -4.3663949728692311e-3, -2.7584509302566441e-3, -1.3485249928215724e-3, -5.3936555990881033e-4, -1.8830543253778101e-4, -6.1653349563133469e-5, -1.9922732576361646e-5, -5.5754249036892551e-6], [4.2395425371019360e-5, 1.1857507206812045e-4, 2.1843988617574956e-4, 2.6587174126899681e-4, 2.3048302954797933e-4, 1.5050370369054937e-4, 7.8151350931039565e-5, 3.4281851150982233e-5, 1.3555485603558988e-5, 5.0388710588834203e-6, 1.5305079637877677e-6], [-6.4408100319480200e-7, -3.0636983559379464e-6, -8.0003769490941126e-6, -1.3195600509039245e-5, -1.5056020029301916e-5, -1.2635199370831100e-5, -8.2435231604253425e-6, -4.4296572948222858e-6, -2.0783052552335129e-6, -8.7933491261392190e-7, -2.8844833205645110e-7], [9.9722071726727436e-9, 7.3884796500705300e-8, 2.6394626405676555e-7, 5.7121744410526431e-7, 8.3199298364814602e-7, 8.7289739572869713e-7, 6.9837424331017539e-7, 4.5036511340891454e-7, 2.4669473336200564e-7, 1.1745893693709542e-7, 4.1348385171149651e-8], [-1.5469095881334154e-10, -1.6897452914969334e-9, -8.0442936147105098e-9, -2.2283623315216674e-8, -4.0502567308581099e-8, -5.2025117657990864e-8, -5.0076821574900310e-8, -3.8105079157412411e-8, -2.4026667327620436e-8, -1.2738218122388818e-8, -4.7823518255272803e-9], [2.3804889399179742e-12, 3.7029382351660521e-11, 2.2991619832975910e-10, 7.9942888311596288e-10, 1.7808440459805741e-9, 2.7536860870417677e-9, 3.1390950926713481e-9, 2.7784555583033974e-9, 1.9919199628138076e-9, 1.1647685000718531e-9, 4.6370044096195635e-10], [-3.6302779235055168e-14, -7.8281114727535161e-13, -6.2257427109571155e-12, -2.6736947709442405e-11, -7.1912761991236626e-11, -1.3197991693439992e-10, -1.7581690739511984e-10, -1.7879073868194681e-10, -1.4416508579375470e-10, -9.2188669309639243e-11, -3.8714595314530633e-11], [5.4675275395260093e-16, 1.6040205940721672e-14, 1.6090163231169446e-13, 8.4182411064515311e-13, 2.6989607124031671e-12, 5.8078777343540390e-12, 8.9369769527360856e-12, 1.0328807906506229e-11, 9.2775482799879919e-12, 6.4384750240236674e-12, 2.8387960074108685e-12], [-8.1658087530594287e-18, -3.1970682560880842e-16, -3.9909830917759497e-15, -2.5134668984854800e-14, -9.4985152484986344e-14, -2.3710509947831826e-13, -4.1713644137031657e-13, -5.4265753695453083e-13, -5.3832027195696035e-13, -4.0266342081537750e-13, -1.8561084119711280e-13], [1.2027828294166983e-19, 6.2156288242285008e-18, 9.5415280525546967e-17, 7.1566866971489897e-16, 3.1561716270328447e-15, 9.0521839591008732e-15, 1.8041128473618502e-14, 2.6190213295583574e-14, 2.8472289189086596e-14, 2.2813296623866582e-14, 1.0952052885380361e-14], [-1.7668351548669522e-21, -1.1813521998223288e-19, -2.2062440000591073e-18, -1.9519802592371025e-17, -9.9556832321976807e-17, -3.2524736066268195e-16, -7.2825784711609598e-16, -1.1705296889597817e-15, -1.3848047077167936e-15, -1.1819172705059184e-15, -5.8889473087475001e-16], [2.5410419362672532e-23, 2.1989613534435758e-21, 4.9475809588277171e-20, 5.1183857563852867e-19, 2.9943221835858134e-18, 1.1055043471251191e-17, 2.7599157250110265e-17, 4.8765129981345062e-17, 6.2383009902332940e-17, 5.6427514729770266e-17, 2.9088662646369683e-17], [-3.6966588308092147e-25, -4.0134672213517399e-23, -1.0780347019267348e-21, -1.2933821867668240e-20, -8.6119408857611715e-20, -3.5665668239736664e-19, -9.8568872016841885e-19, -1.9016957750363954e-18, -2.6148077452926661e-18, -2.4947068980179561e-18, -1.3266657542925406e-18]],
        [[1.0782526682930241e-1, 8.1340464085640227e-2, 4.6425832232049438e-2, 2.0187424449435052e-2, 6.7760957502083049e-3, 1.7973069928002484e-3, 3.9209225251017278e-4, 7.5076109282536110e-5, 1.3883244027659053e-5, 2.7596259326711513e-6, 5.6279113284979837e-7], [-2.6360724299740303e-3, -3.4452316831966427e-3, -3.6679483334348980e-3, -2.7456103917916477e-3, -1.4602542793191098e-3, -5.7429764970083414e-4, -1.7585249187008208e-4, -4.4906681489746078e-5, -1.0486409948321249e-5, -2.4710986108692575e-6, -5.5577247781011223e-7], [3.5530878705583047e-5, 8.7926695374225598e-5, 1.4329613985988969e-4, 1.5044736600739688e-4, 1.0895103742291577e-4, 5.7271352072234168e-5, 2.2999903386527334e-5, 7.5234078305528106e-6, 2.1779726405484274e-6, 6.0692022476370457e-7, 1.5119493121937226e-7], [-5.0648529729687710e-7, -2.1101445362567377e-6, -4.8147887658975721e-6, -6.7878676187794848e-6, -6.4446766754093681e-6, -4.3616775802480151e-6, -2.2195838921310734e-6, -9.0355132703912917e-7, -3.1730161389090793e-7, -1.0310359712837778e-7, -2.8252626558807179e-8], [7.3765455306237375e-9, 4.7461683877272419e-8, 1.4664660834509596e-7, 2.6955797172926197e-7, 3.2588021490383806e-7, 2.7629934626153214e-7, 1.7375251356275063e-7, 8.6075551886028501e-8, 3.5982625827238206e-8, 1.3442080438616867e-8, 4.0180916191625059e-9], [-1.0802173528179969e-10, -1.0152037879305176e-9, -4.1467873720426045e-9, -9.7102818578515593e-9, -1.4627381489928578e-8, -1.5222081131135562e-8, -1.1601959909749608e-8, -6.8689822702144186e-9, -3.3637303097511579e-9, -1.4262459089174975e-9, -4.6137221199289269e-10], [1.5705971130326169e-12, 2.0857635982831651e-11, 1.1040735892002704e-10, 3.2333423619411017e-10, 5.9657269610242962e-10, 7.4958627753225082e-10, 6.8155066590644094e-10, 4.7500698876050050e-10, 2.6874174547835428e-10, 1.2786624832921425e-10, 4.4437810292236893e-11], [-2.2714724145289651e-14, -4.1426307972655629e-13, -2.7940618172516651e-12, -1.0079565218308266e-11, -2.2456964311730490e-11, -3.3604136901182100e-11, -3.5963645973918469e-11, -2.9125108784210322e-11, -1.8808977491666181e-11, -9.9411806433007691e-12, -3.6874549998539558e-12], [3.2347446310767283e-16, 7.9895678072863774e-15, 6.7676641497928390e-14, 2.9687521919418397e-13, 7.8901787530388475e-13, 1.3895524524315429e-12, 1.7301754250993046e-12, 1.6097702472339223e-12, 1.1740692474581941e-12, 6.8312939687707594e-13, 2.6886277177978288e-13], [-4.6092796762460963e-18, -1.5013095538381621e-16, -1.5770364235692851e-15, -8.3178694466769886e-15, -2.6091249686161364e-14, -5.3519676731198589e-14, -7.6738364347592804e-14, -8.1204167289817310e-14, -6.6253825664038185e-14, -4.2097138065236205e-14, -1.7487596535222058e-14], [6.3753324547129866e-20, 2.7557098268938800e-18, 3.5499254709186110e-17, 2.2287133663096101e-16, 8.1728605265388605e-16, 1.9345845322131784e-15, 3.1650063079864626e-15, 3.7748631962728504e-15, 3.4160461906053466e-15, 2.3531370712461427e-15, 1.0268785582547305e-15], [-9.0652294585091210e-22, -4.9515104583053584e-20, -7.7435356299073355e-19, -5.7347986641599797e-18, -2.4374926445185168e-17, -6.6023728900430671e-17, -1.2222335411756110e-16, -1.6295923575386182e-16, -1.6230434937198438e-16, -1.2041789908629956e-16, -5.4967682062312998e-17], [1.2215492184685643e-23, 8.7244019314224558e-22, 1.6412022523881136e-20, 1.4219439996817503e-19, 6.9502522704902647e-19, 2.1377702597818078e-18, 4.4439811497493815e-18, 6.5741862674726667e-18, 7.1558585138345121e-18, 5.6843647463991694e-18, 2.7037978033638190e-18], [-1.6041661184012574e-25, -1.5088290549450282e-23, -3.3855993175024667e-22, -3.4051516779203771e-21, -1.8999363053910194e-20, -6.5879893549394351e-20, -1.5268386144701060e-19, -2.4884867619097656e-19, -2.9406399162532729e-19, -2.4871720051594655e-19, -1.2283416518162441e-19]],
        [[1.0281943839001326e-1, 7.5081424696812860e-2, 4.0077861830567668e-2, 1.5685344339149396e-2, 4.5328512018456719e-3, 9.8214716355242672e-4, 1.6459620032995971e-4, 2.2651645217690092e-5, 2.8471629674524522e-6, 3.8220637885404024e-7, 5.8169905132533835e-8], [-2.3742821556069578e-3, -2.8315795539649682e-3, -2.7182851923781687e-3, -1.8069583383806278e-3, -8.2741624280321705e-4, -2.6840787978929738e-4, -6.4328160693852250e-5, -1.2140195909633976e-5, -1.9964480978492739e-6, -3.2963280658001753e-7, -5.6830231441514600e-8], [3.0095999205705081e-5, 6.6569700222867388e-5, 9.7262855593561783e-5, 8.9605126626931314e-5, 5.5284229972806055e-5, 2.3878190292234819e-5, 7.5449333140605501e-6, 1.8523860642988437e-6, 3.8736676242176068e-7, 7.8017176538202966e-8, 1.5284792045080257e-8], [-4.0389299296316801e-7, -1.4894731008636125e-6, -3.0107416996223511e-6, -3.6866247296675614e-6, -2.9647535121036447e-6, -1.6469587461771489e-6, -6.6272836887126346e-7, -2.0507935262858903e-7, -5.3134775905612031e-8, -1.2816940780724448e-8, -2.8257801181201493e-9], [5.5469899754787075e-9, 3.1354475010398421e-8, 8.4944853331054026e-8, 1.3465623563428276e-7, 1.3732087529511754e-7, 9.5529836921964481e-8, 4.7728618748194867e-8, 1.8177826584532193e-8, 5.7116971364390539e-9, 1.6216796498195120e-9, 3.9797088821353555e-10], [-7.6927351606801533e-11, -6.2924938264569429e-10, -2.2351838983681093e-9, -4.4889886140143573e-9, -5.6872717488100642e-9, -4.8580416651336243e-9, -2.9560577566508699e-9, -1.3597842146134369e-9, -5.0900221494692755e-10, -1.6751359683562767e-10, -4.5291181848783614e-11], [1.0576592670025001e-12, 1.2155269427720877e-11, 5.5584350345513873e-11, 1.3899487920150686e-10, 2.1525690237623656e-10, 2.2223857512070472e-10, 1.6213571403063445e-10, 8.8684862922020410e-11, 3.8953111039151701e-11, 1.4660932384227215e-11, 4.3270193679694727e-12], [-1.4595047825395308e-14, -2.2742203043064610e-13, -1.3176877211391623e-12, -4.0449822127668965e-12, -7.5553527031990899e-12, -9.3047525187516636e-12, -8.0322381257091599e-12, -5.1550590938114209e-12, -2.6221898938943081e-12, -1.1153995503441800e-12, -3.5640396599078610e-13], [1.9521728309584538e-16, 4.1384771962810233e-15, 2.9976736714302991e-14, 1.1159346856718084e-13, 2.4851469373009787e-13, 3.6096688982098025e-13, 3.6450691819974675e-13, 2.7131872010225826e-13, 1.5798993182247738e-13, 7.5159892090337896e-14, 2.5810533480341230e-14], [-2.7084888531144491e-18, -7.3485768916663033e-17, -6.5746412678000862e-16, -2.9371426325427626e-15, -7.7205124082631767e-15, -1.3094857711526298e-14, -1.5313030295041784e-14, -1.3083793175249511e-14, -8.6324624258805576e-15, -4.5500686488969274e-15, -1.6683495955764681e-15], [3.4497100716067890e-20, 1.2763356562823405e-18, 1.3959024806065588e-17, 7.4122889917979550e-17, 2.2791230976137390e-16, 4.4739501434686111e-16, 6.0040217563942531e-16, 5.8343222897952635e-16, 4.3214286835763831e-16, 2.5025993444469414e-16, 9.7404697729428310e-17], [-4.6011044461360532e-22, -2.1721471901450453e-20, -2.8769474465345884e-19, -1.8006018086966464e-18, -6.4239316569004590e-18, -1.4477286891239096e-17, -2.2113762671372895e-17, -2.4234616377274890e-17, -1.9983530446188800e-17, -1.2619135830425835e-17, -5.1863528529421305e-18], [7.5638017726781932e-24, 3.6310115978329264e-22, 5.7698848578095120e-21, 4.2238531244027278e-20, 1.7355435256202890e-19, 4.4573281980977049e-19, 7.6914426308117715e-19, 9.4333837553906267e-19, 8.5938555786794622e-19, 5.8770811306783596e-19, 2.5385889869572695e-19], [-2.3601704034477389e-26, -5.9606764717205636e-24, -1.1286846766763206e-22, -9.5894895088576543e-22, -4.5061483626208314e-21, -1.3096728027040172e-20, -2.5349004641097137e-20, -3.4541911482483330e-20, -3.4516426331511574e-20, -2.5399702112777087e-20, -1.1480451075302116e-20]],
        [[9.8297287331207792e-2, 6.9899671664305904e-2, 3.5319318697356109e-2, 1.2670173405490539e-2, 3.2292631272931585e-3, 5.8821145572355200e-4, 7.7997748085976839e-5, 7.8832513938275584e-6, 6.7201528294154591e-7, 5.8452831037011217e-8, 6.2293673548656654e-9], [-2.1515008554174858e-3, -2.3628514779480070e-3, -2.0645747460909893e-3, -1.2362600174869783e-3, -4.9722151922027902e-4, -1.3631432806385901e-4, -2.6218933597151893e-5, -3.7234896448640557e-6, -4.3020316520701690e-7, -4.8006163423217205e-8, -6.0003728124059818e-9], [2.5735138411940753e-5, 5.1336762323327490e-5, 6.8018103805356815e-5, 5.5826892805351114e-5, 2.9881918526101896e-5, 1.0822353365722969e-5, 2.7446134773156267e-6, 5.1244611347644010e-7, 7.7031113605338895e-8, 1.0842946195273717e-8, 1.5902386105873965e-9], [-3.2619765405715694e-7, -1.0745549344568612e-6, -1.9476122751683295e-6, -2.1014391466896230e-6, -1.4554118669870602e-6, -6.7563847573540380e-7, -2.1857177570052310e-7, -5.1901932840938933e-8, -9.8506334346021224e-9, -1.7085750772993061e-9, -2.9002623059616091e-10], [4.2324773584910924e-9, 2.1239074525568636e-8, 5.1072593164969289e-8, 7.0795897801012821e-8, 6.1847745811371371e-8, 3.5867744918713599e-8, 1.4433763580320059e-8, 4.2530447303752977e-9, 9.9535980354011021e-10, 2.0833881209487781e-10, 4.0346855950379891e-11], [-5.5822996773986389e-11, -4.0110534692084484e-10, -1.2540577440062744e-9, -2.1892154253646120e-9, -2.3663876730747626e-9, -1.6826580663051439e-9, -8.2664105685354188e-10, -2.9652836523079303e-10, -8.3945190183033050e-11, -2.0825554738563183e-11, -4.5410448176064825e-12], [7.2349744570422402e-13, 7.3045430571364041e-12, 2.9206135287586787e-11, 6.3164342017735143e-11, 8.3198086263417986e-11, 7.1457887654190649e-11, 4.2210070148327652e-11, 1.8145406519135995e-11, 6.1139535118396520e-12, 1.7700237437474838e-12, 4.2951723941885674e-13], [-9.6751236604360469e-15, -1.2906742603244901e-13, -6.4998584530053601e-13, -1.7189346361642679e-12, -2.7247071248107693e-12, -2.7917439774574127e-12, -1.9576705480772260e-12, -9.9515057920441400e-13, -3.9356807482824862e-13, -1.3116948898147452e-13, -3.5058453365289141e-14], [1.1863681834997381e-16, 2.2212980487011151e-15, 1.3920238669433794e-14, 4.4488434559951248e-14, 8.3944027818879252e-14, 1.0150599877523393e-13, 8.3570263318660682e-14, 4.9652947332033870e-14, 2.2769031372891543e-14, 8.6319497903418319e-15, 2.5180461208703668e-15], [-1.6270068734816185e-18, -3.7348065442988844e-17, -2.8787573120023587e-16, -1.1013721046992984e-15, -2.4507059144297855e-15, -3.4645244128490188e-15, -3.3163507940472343e-15, -2.2793749403532653e-15, -1.1988459421988496e-15, -5.1150390139689174e-16, -1.6154155719955823e-16], [2.2282080703288206e-20, 6.1539408047159309e-19, 5.7736986909482567e-18, 2.6206351234978745e-17, 6.8186618959626354e-17, 1.1174533048842883e-16, 1.2328152465488827e-16, 9.7114807337323752e-17, 5.8014554366384518e-17, 2.7592765622218077e-17, 9.3666424498604675e-18], [-8.6082354223122267e-23, -9.9332669572954831e-21, -1.1272560036170838e-19, -6.0163970433647567e-19, -1.8162715665535936e-18, -3.4241277275566419e-18, -4.3192888199693647e-18, -3.8669541154770043e-18, -2.6006117893035791e-18, -1.3669966832593385e-18, -4.9558367936774559e-19], [8.5597237335097289e-24, 1.5773350787083760e-22, 2.1384362286403369e-21, 1.3359697683000456e-20, 4.6483691638547425e-20, 1.0010796378670691e-19, 1.4333524478569052e-19, 1.4471751284257581e-19, 1.0868457334344073e-19, 6.2647921284771299e-20, 2.4116519955406527e-20], [3.4436990303725565e-26, -2.4710907548242812e-24, -3.9784318391996788e-23, -2.8776975524533984e-22, -1.1459434223104392e-21, -2.8004399940355901e-21, -4.5198295123440751e-21, -5.1087563784674775e-21, -4.2518796821742178e-21, -2.6680607384456348e-21, -1.0847957883164507e-21]],
        [[9.4188531516974945e-2, 6.5547541291908859e-2, 3.1668993220596801e-2, 1.0576106711624303e-2, 2.4284502287561001e-3, 3.8200222331126720e-4, 4.1333636776480865e-5, 3.1573946365258984e-6, 1.8457792896048886e-7, 1.0075238268457490e-8, 6.9838619175708441e-10], [-1.9602051513236681e-3, -1.9985123479123245e-3, -1.6017097187600072e-3, -8.7412087562283443e-4, -3.1420514511225044e-4, -7.4471836851480570e-5, -1.1800879176492270e-5, -1.2920123267147647e-6, -1.0582239767766093e-7, -7.7626356478563940e-9, -6.5999441519470016e-10], [2.2193062783264756e-5, 4.0244138048657830e-5, 4.8830447332755275e-5, 3.6189309896460311e-5, 1.7084287769272372e-5, 5.2898534542702484e-6, 1.0997459739590588e-6, 1.5905352980450896e-7, 1.7263890331790136e-8, 1.6531068430395341e-9, 1.7156016959754834e-10], [-2.6655127755160203e-7, -7.9048008203587094e-7, -1.2984061873363957e-6, -1.2504900724036803e-6, -7.5734351822335108e-7, -2.9899463245425409e-7, -7.9191657472365929e-8, -1.4640581607953421e-8, -2.0373553957154734e-9, -2.4737730419245803e-10, -3.0743761353742687e-11], [3.2697232560412015e-9, 1.4714129620806047e-8, 3.1751365448807321e-8, 3.8971167098818641e-8, 2.9588604121094335e-8, 1.4533373976521178e-8, 4.7846718327785723e-9, 1.1029542931473738e-9, 1.9186766609446730e-10, 2.8827828571503906e-11, 4.2102989408423939e-12], [-4.1328926833562585e-11, -2.6222219863335575e-10, -7.2936319363729430e-10, -1.1204671515577595e-9, -1.0475469017095014e-9, -6.2904426263678386e-10, -2.5285338388786459e-10, -7.1318376749716015e-11, -1.5200082626198998e-11, -2.7685959964285342e-12, -4.6728251619119905e-13], [4.9815770564065768e-13, 4.5131720161941291e-12, 1.5954155075643928e-11, 3.0194281336380325e-11, 3.4259141758882419e-11, 2.4797535957802821e-11, 1.1994765113794859e-11, 4.0760139433903467e-12, 1.0466457861548058e-12, 2.2709280544973774e-13, 4.3648195259403470e-14], [-6.6439028963706849e-15, -7.5485645367007751e-14, -3.3393653164773376e-13, -7.6971811814468114e-13, -1.0479420707692687e-12, -9.0377463604818239e-13, -5.1971676580554058e-13, -2.1000790821085439e-13, -6.4043944406676278e-14, -1.6302929206985025e-14, -3.5228526015910625e-15], [7.6318820838886701e-17, 1.2318749355798636e-15, 6.7474141267503298e-15, 1.8720497533759717e-14, 3.0265325463697750e-14, 3.0785527472920880e-14, 2.0825701035424704e-14, 9.8933364439439742e-15, 3.5383305290770727e-15, 1.0427071977547124e-15, 2.5047268677545691e-16], [-6.8837322085926414e-19, -1.9634278950639549e-17, -1.3200229416712814e-16, -4.3668285164412719e-16, -8.3090743091851606e-16, -9.8803424353358568e-16, -7.7898676573440833e-16, -4.3068074529959631e-16, -1.7863359025157811e-16, -6.0220472828633002e-17, -1.5921771825937294e-17], [2.7590138616488288e-20, 3.0776895054924063e-19, 2.4948528809575490e-18, 9.8016312971262808e-18, 2.1796895747936245e-17, 3.0063563598981913e-17, 2.7395691875295239e-17, 1.7467737649510298e-17, 8.3180237449441754e-18, 3.1739209233982665e-18, 9.1551090033916155e-19], [3.0762161023466132e-22, -4.7321399788643772e-21, -4.6527004068270433e-20, -2.1311541653839513e-19, -5.4891164171521908e-19, -8.7162812630645154e-19, -9.1104903538010743e-19, -6.6438975733890702e-19, -3.5991928070361598e-19, -1.5395968151735757e-19, -4.8071307987349920e-20], [5.7123038692741619e-24, 7.0917112292693542e-23, 8.3293310192654272e-22, 4.4817297818037740e-21, 1.3309082999612752e-20, 2.4175403748636424e-20, 2.8782162169272777e-20, 2.3824386160997367e-20, 1.4559988548102317e-20, 6.9216200121391175e-21, 2.3230133615909013e-21], [-2.1445178073712454e-25, -1.0681652508859971e-24, -1.4629647741840309e-23, -9.1580005300039893e-23, -3.1150642541373366e-22, -6.4320351280995869e-22, -8.6646166866247237e-22, -8.0819313418097705e-22, -5.5278977517456586e-22, -2.8967237086418115e-22, -1.0382632185974636e-22]],
        [[9.0436125621601263e-2, 6.1845015908862008e-2, 2.8812319833508331e-2, 9.0763621178136612e-3, 1.9127232989142607e-3, 2.6628607379922364e-4, 2.4237600781536149e-5, 1.4467124839415509e-6, 5.9406177316593480e-8, 2.0010761658907334e-9, 8.3160472870166352e-11], [-1.7946246398575029e-3, -1.7108636553306178e-3, -1.2657409111619665e-3, -6.3550907410668562e-4, -2.0717986403690684e-4, -4.3333566272294152e-5, -5.8054206481289717e-6, -5.0403037202246163e-7, -2.9854334186804986e-8, -1.4185922290796292e-9, -7.6539955760533088e-11], [1.9283006664114935e-5, 3.2015143174166534e-5, 3.5875974727491217e-5, 2.4295244816370640e-5, 1.0266813267118093e-5, 2.7672314825346950e-6, 4.8170085840718949e-7, 5.5161347723588320e-8, 4.3822410550189453e-9, 2.8072360828101494e-10, 1.9386300197160994e-11], [-2.2025723392347805e-7, -5.9177046945096440e-7, -8.8906852902323469e-7, -7.7312528817258039e-7, -4.1516986680359422e-7, -1.4172489520885848e-7, -3.1315619836606095e-8, -4.5900967378928869e-9, -4.7258074760379835e-10, -3.9430800474232111e-11, -3.3946782994386250e-12], [2.5489933005242800e-9, 1.0402175089720425e-8, 2.0345415907436313e-8, 2.2359508507196952e-8, 1.4950105152578907e-8, 6.3151618696816761e-9, 1.7292390474304380e-9, 3.1650910310412078e-10, 4.1138507817533731e-11, 4.3488349020687537e-12, 4.5553795680354745e-13], [-3.1344092970760197e-11, -1.7539203891705036e-10, -4.3805740103516059e-10, -5.9894989719632776e-10, -4.9061140097199812e-10, -2.5235955890667474e-10, -8.4220525613167001e-11, -1.8903904480042069e-11, -3.0393776544222676e-12, -3.9795077131831616e-13, -4.9660591753678402e-14], [3.4428023377897304e-13, 2.8600373751923310e-12, 9.0295427205247214e-12, 1.5114909616627493e-11, 1.4951482286400368e-11, 9.2396411873957864e-12, 3.7068880329263584e-12, 1.0052532075793517e-12, 1.9658663013764812e-13, 3.1275202533076735e-14, 4.5657662742193084e-15], [-4.3561048191413751e-15, -4.5353506822517211e-14, -1.7818868516550185e-13, -3.6166878327682990e-13, -4.2775109067772060e-13, -3.1423387197941830e-13, -1.4984295446325069e-13, -4.8482408254078378e-14, -1.1367184889989975e-14, -2.1613268154134681e-15, -3.6334275054499417e-16], [7.4986614326670811e-17, 7.0430566352981133e-16, 3.3884059857588485e-15, 8.2691908123218527e-15, 1.1590024719285699e-14, 1.0027986185387311e-14, 5.6278919936385421e-15, 2.1489666731956457e-15, 5.9650602243152268e-16, 1.3359917793075650e-16, 2.5509663563453937e-17], [7.0734999821998422e-19, -1.0654584008328385e-17, -6.3628699832998982e-17, -1.8261103404842480e-16, -2.9968292853971695e-16, -3.0262878643123264e-16, -1.9811944373852877e-16, -8.8413757830991648e-17, -2.8730699783950828e-17, -7.4827201794381843e-18, -1.6032948910503591e-18], [4.0788956280769134e-20, 1.5834644533579620e-19, 1.1144452710709826e-18, 3.8568702445743208e-18, 7.4127886545571071e-18, 8.6838403758779503e-18, 6.5808488344815725e-18, 3.4024277019672457e-18, 1.2813263210630248e-18, 3.8359831404277334e-19, 9.1251948671851432e-20], [9.1148897625979452e-23, -2.3555407033786726e-21, -1.9984174727875462e-20, -7.9599704565648402e-20, -1.7661431889987455e-19, -2.3812481102812802e-19, -2.0737202018712247e-19, -1.2322323178562085e-19, -5.3284358114206900e-20, -1.8146062092633971e-20, -4.7471905299288044e-21], [-1.9607874820742555e-23, 3.3337290676236603e-23, 3.5214406698078348e-22, 1.5961725918840328e-21, 4.0612510402253583e-21, 6.2627757759047567e-21, 6.2260570438817797e-21, 4.2207462227734185e-21, 2.0780229469892381e-21, 7.9739273787675919e-22, 2.2747671192964847e-22], [-7.6382220652686307e-25, -4.5554378867401527e-25, -5.3176385826329330e-24, -3.0619870285582018e-23, -9.0172234967233064e-23, -1.5835744468024852e-22, -1.7861184792537019e-22, -1.3717297532118852e-22, -7.6274654843009611e-23, -3.2686090290460195e-23, -1.0089145303455272e-23]],
        [[8.6993230344396919e-2, 5.8658757997090056e-2, 2.6537572121014007e-2, 7.9740914355668981e-3, 1.5671694995663025e-3, 1.9737249300659414e-4, 1.5554200260435420e-5, 7.5158883924522500e-7, 2.2445856027332541e-8, 4.6812866552935646e-10, 1.0731349859924882e-11], [-1.6502845185636111e-3, -1.4805624385632381e-3, -1.0164714109747280e-3, -4.7297284406511097e-4, -1.4154368752352588e-4, -2.6598681517311179e-5, -3.0870630127840772e-6, -2.1902229013740629e-7, -9.6585509398119833e-9, -2.9794102577091352e-10, -9.5128156265144397e-12], [1.6865289663820554e-5, 2.5807749856879984e-5, 2.6905177178011396e-5, 1.6824528955464909e-5, 6.4497818723792420e-6, 1.5384153651269091e-6, 2.2882253513148331e-7, 2.1243223575668483e-8, 1.2616069122804111e-9, 5.3883907661308928e-11, 2.3255923564429684e-12], [-1.8407563549440074e-7, -4.5005899792993324e-7, -6.2335684498268148e-7, -4.9446895676853845e-7, -2.3839765479740669e-7, -7.1459315652374310e-8, -1.3419192922087804e-8, -1.5916353744189594e-9, -1.2321658378276111e-10, -7.0117182273530831e-12, -3.9486122335187911e-13], [1.9964007453037778e-9, 7.4896840260626666e-9, 1.3402564815673459e-8, 1.3319977058733901e-8, 7.9367858975745405e-9, 2.9248259172546255e-9, 6.7727591809030597e-10, 1.0014581076218376e-10, 9.8412639130293011e-12, 7.2400689378365816e-13, 5.1591790014052767e-14], [-2.4239280648811641e-11, -1.1975840447071056e-10, -2.7081385396432440e-10, -3.3296891339552145e-10, -2.4183492563625927e-10, -1.0802397310541303e-10, -3.0387091301400236e-11, -5.5082776142991916e-12, -6.7362119432751987e-13, -6.2545096342531794e-14, -5.4953029545305269e-15], [2.6191391831567097e-13, 1.8556720212569120e-12, 5.2665960014139479e-12, 7.8828556381775636e-12, 6.8792115917171959e-12, 3.6767321384335673e-12, 1.2402550727328027e-12, 2.7175374038268520e-13, 4.0681973392578846e-14, 4.6719625754538190e-15, 4.9508001023343351e-16], [-1.2491511173969189e-15, -2.7907910185992798e-14, -9.9263240103577386e-14, -1.7816426831123763e-13, -1.8460493246469826e-13, -1.1680625896876432e-13, -4.6743142644868014e-14, -1.2233959403260641e-14, -2.2106730331581195e-15, -3.0860397148973805e-16, -3.8699945346709819e-17], [1.2713961314412437e-16, 4.1352304457773416e-16, 1.7274315054340262e-15, 3.7982172936984051e-15, 4.6866902736254201e-15, 3.4919367380706265e-15, 1.6439600633796343e-15, 5.0877710939540984e-16, 1.0962093770180200e-16, 1.8320473021543049e-17, 2.6743216623999274e-18], [1.9881342987613402e-18, -5.9937729955036859e-18, -3.2470368457101062e-17, -8.0471391384547813e-17, -1.1456300066057661e-16, -9.9168408597687815e-17, -5.4415918092705828e-17, -1.9728285006456765e-17, -5.0129857036512658e-18, -9.8950733115182324e-19, -1.6572403095314714e-19], [8.7058700608479353e-21, 8.3131213820014655e-20, 5.3047274604630957e-19, 1.6013065952135539e-18, 2.6740188750263539e-18, 2.6837475749872736e-18, 1.7053029419036663e-18, 7.1836597608847415e-19, 2.1315403544585886e-19, 4.9090845470251799e-20, 9.3135663290741589e-21], [-1.9034219524414560e-21, -1.1865378451291119e-21, -7.9046252115213907e-21, -3.0593566132560619e-20, -6.0090112899950260e-20, -6.9569234487892855e-20, -5.0855174150520634e-20, -2.4704428902953725e-20, -8.4825398061413224e-21, -2.2543124208125255e-21, -4.7902835974230757e-22], [-6.2890970272038798e-23, 1.7620093786303806e-23, 1.7975505459952251e-22, 6.1395561173014990e-22, 1.3195940091298475e-21, 1.7359033825359016e-21, 1.4492391496498443e-21, 8.0610258054049798e-22, 3.1762146726838428e-22, 9.6425970309776272e-23, 2.2718885961787884e-23], [-6.6445962531433633e-25, -1.9354295201023223e-25, -1.9686311330982690e-24, -1.0742890301818081e-23, -2.7700845817204505e-23, -4.1685908999309942e-23, -3.9563383201724064e-23, -2.5031461500287601e-23, -1.1228067456851054e-23, -3.8569684125018567e-24, -9.9828437120820892e-25]],
        [[8.3820949154878599e-2, 5.5888320056224400e-2, 2.4698510581543704e-2, 7.1462134231639248e-3, 1.3279348502131206e-3, 1.5423705322757359e-4, 1.0805803807087867e-5, 4.3787997608640913e-7, 9.9210456222963807e-9, 1.3146021485620949e-10, 1.5433449833981826e-12], [-1.5236894580629385e-3, -1.2938336070861888e-3, -8.2787692207526166e-4, -3.5893494207194925e-4, -9.9546659335286029e-5, -1.7063625704403504e-5, -1.7539092106745698e-6, -1.0477362938905753e-7, -3.5640121194950374e-9, -7.2876827833792831e-11, -1.2950379826558554e-12], [1.4833134149599073e-5, 2.1054183027711627e-5, 2.0552711204697758e-5, 1.1979050462110356e-5, 4.2162266416387562e-6, 9.0335059964580807e-7, 1.1699298224235117e-7, 9.0163946398993613e-9, 4.1096628659871058e-10, 1.1835260862614105e-11, 3.0144783450856354e-13], [-1.5567276191001130e-7, -3.4720672946556168e-7, -4.4622350055293269e-7, -3.2582453392266090e-7, -1.4262716950315635e-7, -3.8072293311327242e-8, -6.1847556784961054e-9, -6.0643283124763144e-10, -3.6074686197525756e-11, -1.4071901195973871e-12, -4.9097285680807363e-14], [1.5742906895677806e-9, 5.4835401083979856e-9, 9.0533271975742722e-9, 8.2094543194605371e-9, 4.4061559670334726e-9, 1.4353930023197767e-9, 2.8564401063887472e-10, 3.4760755320964744e-11, 2.6274391181752318e-12, 1.3449989671404997e-13, 6.1920660811264360e-15], [-1.7849882509591465e-11, -8.3282739718231935e-11, -1.7246952526694698e-10, -1.9220070971823021e-10, -1.2499692753306866e-10, -4.9085568750502554e-11, -1.1810952429842731e-11, -1.7573731123467642e-12, -1.6569073517182281e-13, -1.0862709522426602e-14, -6.3984741271837910e-16], [2.9390896845016843e-13, 1.2311220218269762e-12, 3.1113297515772231e-12, 4.2354743818819538e-12, 3.3118223617995670e-12, 1.5529383107105310e-12, 4.4689900278251778e-13, 8.0273814079049240e-14, 9.2950089850426606e-15, 7.6467232682378195e-16, 5.6152021461714064e-17], [3.8111553425832790e-15, -1.7574382327310997e-14, -5.9135096819556788e-14, -9.2795544719724108e-14, -8.4210469172921799e-14, -4.6250370210574432e-14, -1.5711673535726580e-14, -3.3668397798450874e-15, -4.7237578633320342e-16, -4.7914736548050143e-17, -4.2900436337510357e-18], [1.7612081388407030e-16, 2.4704556277756872e-16, 8.7730171785471493e-16, 1.7962286384616363e-15, 1.9887796098814637e-15, 1.2934332959888996e-15, 5.1705286347603331e-16, 1.3108911720645642e-16, 2.2032072873577154e-17, 2.7133487582616802e-18, 2.9055868856024712e-19], [-2.9617877234917020e-19, -3.4960486103986036e-18, -1.5995976068789943e-17, -3.6324244538767051e-17, -4.5983600818079926e-17, -3.4589759168729437e-17, -1.6085717007959861e-17, -4.7805380735223890e-18, -9.5239406154402906e-19, -1.4045979913377781e-19, -1.7688301019150163e-20], [-1.4655311758031138e-19, 4.6384233930908573e-20, 3.4041369505974315e-19, 7.4594311102498697e-19, 1.0323901135977390e-18, 8.8588770235788932e-19, 4.7548996865173921e-19, 1.6435615681985485e-19, 3.8447368183732370e-20, 6.7063168048496938e-21, 9.7848032238851810e-22], [-5.0455445778918225e-21, -5.4976468573569909e-22, -1.4308874690216019e-21, -1.1147169155638754e-20, -2.1268687740625723e-20, -2.1619972126099203e-20, -1.3402753192532117e-20, -5.3549507607886253e-21, -1.4582619924383780e-21, -2.9744727785610127e-22, -4.9620520988718350e-23], [-4.6128637939271799e-23, 9.1717925141367921e-24, 8.9477575651935513e-23, 2.4738463928915618e-22, 4.5399855992716276e-22, 5.1318711967006759e-22, 3.6232667012137634e-22, 1.6608120254919909e-22, 5.2224043601796330e-23, 1.2327584953564438e-23, 2.3236803737593590e-24], [1.9238622836074441e-24, -1.6088025075036751e-25, -2.0348789323616309e-24, -4.7182724646666451e-24, -9.1979554404295567e-24, -1.1722937385535081e-23, -9.4041102812280954e-24, -4.9163195977836012e-24, -1.7714049569350092e-24, -4.7914349871946646e-25, -1.0094533038234934e-25]],
        [[8.0886605829927972e-2, 5.3456867939847340e-2, 2.3191802382179744e-2, 6.5131984214778102e-3, 1.1578877700003528e-3, 1.2612340215124441e-4, 8.0439188761462152e-6, 2.8268107142466732e-7, 5.0871385385795059e-9, 4.4885411293331508e-11, 2.5693922906904042e-13], [-1.4120928874311110e-3, -1.1406914728422989e-3, -6.8264983401580644e-4, -2.7676936589200938e-4, -7.1629928512757698e-5, -1.1337206620863740e-5, -1.0519313589287449e-6, -5.4417867957010641e-8, -1.4839579885842384e-9, -2.0900075442856741e-11, -1.9860712380092723e-13], [1.3105778935544434e-5, 1.7363934307556806e-5, 1.5965047108223356e-5, 8.7461393446674969e-6, 2.8572660124834415e-6, 5.5741552125182135e-7, 6.3949769992957719e-8, 4.1847043891938696e-9, 1.5065970581705350e-10, 2.9985790508220509e-12, 4.3180937508200662e-14], [-1.3290970659071512e-7, -2.7134255135536080e-7, -3.2542001596188006e-7, -2.2048249612385281e-7, -8.8498976462053831e-8, -2.1303475716474388e-8, -3.0431432854457331e-9, -2.5195456227476451e-10, -1.1810864986034108e-11, -3.2137615581154017e-13, -6.6479671269257845e-15], [1.2995411209904116e-9, 4.0776624186822639e-9, 6.2310102791767295e-9, 5.2006174290799212e-9, 2.5416508473828607e-9, 7.4154248507316246e-10, 1.2883877156552492e-10, 1.3152781618446698e-11, 7.8095588252437267e-13, 2.8122231118234950e-14, 7.9993683296717618e-16], [-8.9401572852161829e-12, -5.8852023694156087e-11, -1.1493471868051167e-10, -1.1625625620133744e-10, -6.7900268341220230e-11, -2.3623381332479690e-11, -4.9224590058955898e-12, -6.1096861413877160e-13, -4.5181049224911460e-14, -2.1031571798765271e-15, -7.9436861657745261e-17], [4.6723357186192810e-13, 8.3310673859410814e-13, 1.7803272243389251e-12, 2.2817046133947861e-12, 1.6438827693195759e-12, 6.8997346270249332e-13, 1.7229393654888816e-13, 2.5793103158539303e-14, 2.3443913283248019e-15, 1.3833788341127423e-16, 6.7378931420303128e-18], [7.6925443930112142e-15, -1.1365391170485758e-14, -3.7712543017295879e-14, -5.1264409406038343e-14, -4.0593171276027160e-14, -1.9446864377338499e-14, -5.6665099124674818e-15, -1.0072113708990660e-15, -1.1099012657528749e-16, -8.1601768542763866e-18, -4.9985149792423622e-19], [4.4219349303149003e-18, 1.4970491059077856e-16, 5.3957704192121366e-16, 9.3318225782475061e-16, 8.9886945259402281e-16, 5.0963033971477351e-16, 1.7450316773269066e-16, 3.6663095957979545e-17, 4.8501594431607120e-18, 4.3773494528608810e-19, 3.2997279458088474e-20], [-1.0680317069577607e-17, -2.0263411430202010e-18, -2.8398361273308965e-18, -1.3621159355264088e-17, -1.8404035679831210e-17, -1.2659469565763177e-17, -5.0893841470995550e-18, -1.2551858936262231e-18, -1.9743285081468808e-19, -2.1580225294592723e-20, -1.9640805908632010e-21], [-3.5498463512691166e-19, 2.8734000881247155e-20, 3.2325362875696056e-19, 4.3603504372108167e-19, 4.4158868504513491e-19, 3.1377271727401288e-19, 1.4239296731595299e-19, 4.0697729366150177e-20, 7.5391996150642008e-21, 9.8582807009865539e-22, 1.0651171259364984e-22], [-2.3209379368857696e-21, -3.2617908233195830e-22, -7.6476229685712759e-22, -4.7216254024747720e-21, -8.0193032415557345e-21, -7.1400470593853030e-21, -3.7852396162545353e-21, -1.2538309593629169e-21, -2.7154950770808278e-22, -4.2005389590289119e-23, -5.3069556400752564e-24], [2.2245695238381499e-22, 5.0470954459191483e-26, -9.0778610655803687e-23, 1.9929036587381329e-23, 1.4215812436144666e-22, 1.5831133885503264e-22, 9.6873637060567671e-23, 3.6894753658644549e-23, 9.2683424846446782e-24, 1.6784594317547053e-24, 2.4463772994310844e-25], [9.0671667374854420e-24, -1.6234474284730656e-25, -5.3202942476533548e-24, -4.6841240407385596e-24, -3.9545649929400233e-24, -3.6085864927940417e-24, -2.4006658228842025e-24, -1.0395712621152130e-24, -3.0061506370481246e-25, -6.3103528234843857e-26, -1.0478987702647928e-26]],
        [[7.8162458976116925e-2, 5.1304813533012246e-2, 2.1942946816835212e-2, 6.0221433342876170e-3, 1.0345507702695942e-3, 1.0722067838478591e-4, 6.3565993230313812e-6, 1.9977529511645741e-7, 2.9902927996410779e-9, 1.8710705215059109e-11, 5.1979230524692765e-14], [-1.3132821313664489e-3, -1.0137782140596927e-3, -5.6901604242150219e-4, -2.1612841507213426e-4, -5.2419408698674803e-5, -7.7296127253893107e-6, -6.5761061427162757e-7, -3.0206136210863233e-8, -6.8619995116034671e-10, -7.0084295970570941e-12, -3.5464967171018085e-14], [1.1631880392799085e-5, 1.4463682061821395e-5, 1.2588949694899262e-5, 6.5313196781067611e-6, 2.0004762913393192e-6, 3.5984861193597407e-7, 3.7155392465543631e-8, 2.1081910421526491e-9, 6.1707250700235426e-11, 8.7858620666331043e-13, 7.0204683479397770e-15], [-1.1287020224730261e-7, -2.1452915553163949e-7, -2.4211614019094110e-7, -1.5333030525368211e-7, -5.6887719379441537e-8, -1.2475440078022684e-8, -1.5890752068349174e-9, -1.1327666364978943e-10, -4.2960073795969090e-12, -8.3830410459636541e-14, -1.0022141537676337e-15], [1.2485360221138168e-9, 3.0773291152074890e-9, 4.2840590255930935e-9, 3.3227557069491377e-9, 1.5007064652423985e-9, 3.9857265194194098e-10, 6.1552147088878890e-11, 5.3810996998534946e-12, 2.5709585720402723e-13, 6.6508781163155190e-15, 1.1334479153820897e-16], [4.4205003936009670e-12, -4.2195083289444286e-11, -8.2936089107057223e-11, -7.5688826672604151e-11, -3.9341661701927211e-11, -1.2102936084353033e-11, -2.1971211895368416e-12, -2.3049532023802174e-13, -1.3617914429073695e-14, -4.5664687722078372e-16, -1.0686292370737019e-17], [6.0735787456275205e-13, 5.7239177696080562e-13, 9.6758333230612249e-13, 1.2122200371347761e-12, 8.3114351264493763e-13, 3.1952889956857296e-13, 7.0551990540040942e-14, 8.9633865091225611e-15, 6.5121142261235562e-16, 2.7843716749614342e-17, 8.6735683713223058e-19], [-9.9381241474194022e-16, -7.5491967204359913e-15, -1.9772756696219339e-14, -2.6308438320301780e-14, -1.9618599610919292e-14, -8.5123467334578236e-15, -2.1736418206728484e-15, -3.2591404269713720e-16, -2.8640778097394799e-17, -1.5350229532268241e-18, -6.1958591424919361e-20], [-6.1783209265856717e-16, 9.3824199767855130e-17, 6.4234948755774850e-16, 7.0263473220458349e-16, 4.8260629816109321e-16, 2.2032070307097882e-16, 6.3471663879478477e-17, 1.1108765113679171e-17, 1.1693627182218035e-18, 7.7479257159721035e-20, 3.9585024507666889e-21], [-2.1880989800480038e-17, -1.1843228337553197e-18, 7.0459782223525838e-18, -9.5528633907897120e-19, -6.4453738063729729e-18, -4.7005917230726332e-18, -1.7046204188901636e-18, -3.5557991518908771e-19, -4.4672085376731780e-20, -3.6149729182155992e-21, -2.2899241645704468e-22], [-3.2300970841243724e-20, 1.2670500153845630e-20, 8.5220647939847034e-20, 1.6010232534151531e-19, 1.7556872299183815e-19, 1.1520239717493567e-19, 4.5463438205507246e-20, 1.0879665720387027e-20, 1.6090461386495566e-21, 1.5708499001435758e-22, 1.2111056257682266e-23], [2.1264724928600465e-20, -4.0253436304664807e-22, -1.2461341598284449e-20, -9.7511261275015984e-21, -5.2971244856233983e-21, -2.7861005524110968e-21, -1.1611688210106276e-21, -3.1709672117779294e-22, -5.4869507395492467e-23, -6.3950925546339774e-24, -5.9023700698646490e-25], [7.2722179105393713e-22, 8.4280459442660873e-25, -3.7569064011856652e-22, -2.1243602933978371e-22, -1.0576351772341055e-23, 4.3166932962598890e-23, 2.7021973934156760e-23, 8.8042871526838647e-24, 1.7789510999169456e-24, 2.4511854462538164e-25, 2.6679709067616338e-26], [3.8992374660618578e-24, 3.0744615551103776e-25, -2.1811460701412505e-24, -2.2247917014408567e-24, -1.6777532043939464e-24, -1.2070723503988116e-24, -6.6021598930163777e-25, -2.3675845766261079e-25, -5.5023149982613244e-26, -8.8718353308896438e-27, -1.1230410192630937e-27]],
        [[7.5624907933821281e-2, 4.9385365871728407e-2, 2.0897170053964562e-2, 5.6368784593061777e-3, 9.4380668583843072e-4, 9.4232064696255990e-5, 5.2881754009408825e-6, 1.5276617394813724e-7, 1.9868211454184850e-9, 9.4703981765733300e-12, 1.3496112841075695e-14], [-1.2252936331335720e-3, -9.0758874441559586e-4, -4.7887937538284266e-4, -1.7043975822135141e-4, -3.8791582690474324e-5, -5.3572728421441565e-6, -4.2273096636615650e-7, -1.7601561310428792e-8, -3.4510202730739883e-10, -2.7091432662114506e-12, -7.6153980495971814e-15], [1.0402638120885045e-5, 1.2159142098241242e-5, 1.0043767748845071e-5, 4.9649316932056505e-6, 1.4389967891892936e-6, 2.4157731637461239e-7, 2.2795438247719851e-8, 1.1441733223463080e-9, 2.8003179614867620e-11, 2.9686675148957695e-13, 1.3324740078351157e-15], [-9.1452980574133349e-8, -1.7136294531695249e-7, -1.8572270607175404e-7, -1.1090059724554087e-7, -3.8245004560883540e-8, -7.6865195953742608e-9, -8.8096444883455355e-10, -5.4876639921107117e-11, -1.7241880824944493e-12, -2.4946098344395116e-14, -1.7229651075417563e-16], [1.4659696412989893e-9, 2.3552762362854065e-9, 2.8256945728613897e-9, 2.0533245926369857e-9, 8.7710113207832603e-10, 2.1744703490754860e-10, 3.0596709999303621e-11, 2.3497411329847346e-12, 9.2926328616842031e-14, 1.7796602808416189e-15, 1.7986618753331971e-17], [1.5748861283686738e-11, -3.0691641635697668e-11, -6.3809456668295054e-11, -5.2906186053604305e-11, -2.4418476431992154e-11, -6.6276496517261094e-12, -1.0509729008851904e-12, -9.4097400264514427e-14, -4.5197697963566046e-15, -1.1148204750399615e-16, -1.5866018764327303e-18], [1.9610914142073618e-13, 3.9715135437636608e-13, 7.3679849685800436e-13, 7.8825478561514242e-13, 4.7009338231223662e-13, 1.5954621353743878e-13, 3.0917429972828106e-14, 3.3610058039828875e-15, 1.9851767047980965e-16, 6.2570453017637786e-18, 1.2173094148673469e-19], [-3.1191851747277191e-14, -5.1619685179305811e-15, 4.1188860271250385e-15, -4.1568632675021198e-15, -7.0042687917871005e-15, -3.4908831243258971e-15, -8.5469143720096976e-16, -1.1257485367016604e-16, -8.0817379317755063e-18, -3.2034268203355428e-19, -8.2876212134309601e-21], [-1.1149302953984686e-15, 5.6733644949047136e-17, 7.7961661514367408e-16, 6.5342788794306969e-16, 3.1835533626604148e-16, 1.0878291491056326e-16, 2.5270550389894601e-17, 3.6536275296036676e-18, 3.0856207888731132e-19, 1.5126344339713201e-20, 5.0799055223572894e-22], [4.7773808778327661e-18, -9.3750497261832656e-19, -5.2681306477619310e-18, -5.9293459142327017e-18, -4.3456417876724272e-18, -2.0975065025157531e-18, -6.2186858206749286e-19, -1.0872119615817940e-19, -1.1020709386311274e-20, -6.6397229988412706e-22, -2.8346521687163158e-23], [1.5148130995423374e-18, 4.4099417935549040e-21, -7.7620823872960343e-19, -4.5416223988466654e-19, -7.3889974036712279e-20, 2.3526983365584753e-20, 1.3963149122062419e-20, 3.0832787068217513e-21, 3.7306729246307491e-22, 2.7295045265466367e-23, 1.4527153175723056e-24], [3.8897793423052136e-20, 2.5236748242286233e-22, -2.1235292532325928e-20, -1.4951752807842684e-20, -5.4353988461733504e-21, -1.5385745373199399e-21, -4.1400203401498849e-22, -8.7658901884774849e-23, -1.2055246399411387e-23, -1.0563189126497354e-24, -6.8864172730438078e-26], [-5.9793557169513143e-22, 2.6943594564053574e-23, 3.3548220391655822e-22, 2.0998310366037205e-22, 7.0953114725518597e-23, 2.3643839551756294e-23, 8.5993513047634657e-24, 2.2635512974407931e-24, 3.6944073019850258e-25, 3.8637860053261062e-26, 3.0374725785108795e-27], [-6.3397540824026941e-23, 2.6304348539165515e-25, 3.3960829099995127e-23, 2.1674756315132699e-23, 5.7642737384714276e-24, 5.0072398375750608e-25, -1.2854253247929551e-25, -5.5886013464523311e-26, -1.0853566895300009e-26, -1.3400125845176566e-27, -1.2511420930744691e-28]],
        [[7.3254363790473462e-2, 4.7661373166375499e-2, 2.0013186742676364e-2, 5.3318495814561370e-3, 8.7642847310232106e-4, 8.5193924838384780e-5, 4.5965656586127220e-6, 1.2500317393171306e-7, 1.4693033369116875e-9, 5.7351519651872476e-12, 4.7130856761255681e-15], [-1.1460396753978775e-3, -8.1794391081494921e-4, -4.0676569701410055e-4, -1.3555880534610513e-4, -2.8910184748354368e-5, -3.7433232349647254e-6, -2.7570153608134935e-7, -1.0562171739220753e-8, -1.8406400669434342e-10, -1.1759383591186707e-12, -2.0037550989625150e-15], [9.4561858669916405e-6, 1.0310188134401979e-5, 8.0475794658140189e-6, 3.7996409868576983e-6, 1.0499909873036423e-6, 1.6643803696806638e-7, 1.4579313937145567e-8, 6.6087863687714699e-10, 1.3918909416207456e-11, 1.1475289949540159e-13, 3.0248748958312328e-16], [-6.5584710224768184e-8, -1.3811713427557828e-7, -1.4967503830896510e-7, -8.5485545489558475e-8, -2.7553442421712932e-8, -5.0867518457590596e-9, -5.2598232509638956e-10, -2.8826872508700907e-11, -7.6238227322251962e-13, -8.4385009479559754e-15, -3.4530939931757696e-17], [1.7388505841484123e-9, 1.8259876758706802e-9, 1.7486047109958984e-9, 1.1857859884953828e-9, 4.9089790781240025e-10, 1.1701902703237863e-10, 1.5455027111353292e-11, 1.0746335035537403e-12, 3.6362899831195645e-14, 5.3574672461533870e-16, 3.2618397004015277e-18], [6.5863350917832080e-12, -2.2718294907292271e-11, -4.2348648991748204e-11, -3.3370501875183466e-11, -1.4513194971523629e-11, -3.6442314030249687e-12, -5.2234267749468537e-13, -4.0969027628738923e-14, -1.6395928141395470e-15, -3.0571801289858144e-17, -2.6494539307149715e-19], [-1.0528990904846085e-12, 2.7343746097496274e-13, 1.1221907118950604e-12, 9.0172107165259951e-13, 3.8681341827217984e-13, 9.9833193046369600e-14, 1.5536697058007905e-14, 1.3912404148416876e-15, 6.6589382386462059e-17, 1.5720542693919345e-18, 1.8950327071339722e-20], [-5.0115244471635289e-14, -3.8088030638774921e-15, 1.8781105446865516e-14, 8.9071284418585114e-15, -2.4736977482801257e-16, -1.1434460839289788e-15, -3.2544488820413409e-16, -4.0453493767605618e-17, -2.4669898493820287e-18, -7.4195940289781479e-20, -1.2150648466074800e-21], [3.8679306285694746e-16, 3.2056196477871779e-17, -9.9414852383484230e-17, 1.4935963082847982e-17, 6.9447767374467532e-17, 3.7927589015055198e-17, 9.5427938224623873e-18, 1.2611783281493712e-18, 8.8547225595761609e-20, 3.2665671815371543e-21, 7.0730815378001369e-23], [7.8013110389483709e-17, -2.0983542209651074e-19, -4.3253729647170194e-17, -2.9711961824207091e-17, -9.8117475039234032e-18, -2.0372829072083734e-18, -3.1983907408851759e-19, -3.8381105059587037e-20, -2.9935108997150917e-21, -1.3432382083782735e-22, -3.7734258229329799e-24], [1.3030036306938108e-18, 3.6025040123262693e-20, -6.6788784420722629e-19, -4.3849633007234218e-19, -1.1156507400964354e-19, -4.9206611972373496e-21, 3.6513522185940455e-21, 8.8893232995074497e-22, 9.2926544510990034e-23, 5.1879246845540538e-24, 1.8593341360069512e-25], [-7.4155969275144338e-20, 6.7274648583599301e-22, 3.9708311329544454e-20, 2.4862694132206260e-20, 6.4235485627173933e-21, 5.9084679818138592e-22, -6.4305224628240444e-23, -2.3459065472918818e-23, -2.8508361168612521e-24, -1.9020088690594140e-25, -8.5156348412047125e-27], [-3.4922325661706996e-21, -3.6957192805669342e-23, 1.8632382329701981e-21, 1.2515622826125294e-21, 3.7735246939653724e-22, 6.2111131451509073e-23, 6.9266777753608762e-24, 7.7469022862644347e-25, 8.5263107964084774e-26, 6.6173483846116683e-27, 3.6435279187138522e-28], [1.4260307158231777e-23, -2.5862239756047507e-24, -8.4933301640205236e-24, -3.4304746453956920e-24, -2.8574981711137341e-25, 3.2161304438036668e-26, -2.6155799542048066e-26, -1.2950586829359887e-26, -2.2681167625840091e-27, -2.1826765397564622e-28, -1.4609143862238487e-29]],
        [[7.1035775236144315e-2, 4.6103047578975993e-2, 1.9258648105959983e-2, 5.0880799252414759e-3, 8.2604276990551183e-4, 7.8864806192202266e-5, 4.1443285141977677e-6, 1.0824214389248063e-7, 1.1891908251549266e-9, 4.0595343814171575e-12, 2.2487691641800769e-15], [-1.0730663405560781e-3, -7.4162774632550171e-4, -3.4914791127185453e-4, -1.0898515486009510e-4, -2.1718089230107795e-5, -2.6288943337319985e-6, -1.8078604763008424e-7, -6.4186476519578833e-9, -1.0144138437032047e-10, -5.5319765507062313e-13, -6.3939086069631305e-16], [8.8348321961403430e-6, 8.8141442247503438e-6, 6.3965657719731856e-6, 2.8696392566859087e-6, 7.5852604982731791e-7, 1.1462164956306241e-7, 9.4648402747593085e-9, 3.9607181813508126e-10, 7.4076464057360124e-12, 4.9865570066205650e-14, 8.3197083692866481e-17], [-3.8499021888964319e-8, -1.1221385633577093e-7, -1.2685687005426982e-7, -7.0603943479788094e-8, -2.1518956154748583e-8, -3.6766252200271187e-9, -3.4462104544995192e-10, -1.6690938480284733e-11, -3.7486734539162980e-13, -3.2477233106439804e-15, -8.2046457119644576e-18], [1.5231167891511513e-9, 1.4292162846467115e-9, 1.2052676949659790e-9, 7.5085771238005905e-10, 2.9276904361937915e-10, 6.5924042248461745e-11, 8.1355875166727426e-12, 5.1631743415661349e-13, 1.5266723720500422e-14, 1.7956889362513923e-16, 6.8596290332977439e-19], [-3.1375531618255903e-11, -1.7316083063919010e-11, -1.0977657473170550e-11, -9.7210586067479568e-12, -5.3997053555583337e-12, -1.5622400719757459e-12, -2.3397143964670620e-13, -1.7681805491347564e-14, -6.2905255809686430e-16, -9.3183837359120835e-18, -5.0569190886964105e-20], [-1.8385982558054139e-12, 1.8210394390261545e-13, 1.3592218181871954e-12, 9.8988921918400302e-13, 3.5638296161314975e-13, 7.4045885676188347e-14, 9.1640899810954268e-15, 6.5588792582841531e-16, 2.4968148064261703e-17, 4.4352502961586247e-19, 3.3274886198438547e-21], [8.3776034778812063e-15, -2.6166300309931505e-15, -9.7275401287940361e-15, -8.0647718025672583e-15, -3.7036858483371633e-15, -1.0427204706385958e-15, -1.7630848722773009e-16, -1.6796742606746835e-17, -8.2769128919208939e-19, -1.9063039260273115e-20, -1.9824137878255731e-22], [2.9891691086870181e-15, 4.9788468875400812e-17, -1.5266272473340889e-15, -9.7583984996187009e-16, -2.5521526009028281e-16, -2.5724078132882571e-17, 7.6378665967505718e-19, 3.5383857769107234e-19, 2.5958284647882244e-20, 7.7360081030693214e-22, 1.0839029086030356e-23], [2.9742192410809493e-17, 9.1598518472306359e-19, -1.6442920573476037e-17, -1.2420118829873200e-17, -4.5379632980954721e-18, -1.0042422546870466e-18, -1.4848191788549745e-19, -1.4773310287322756e-20, -9.0356338904234342e-22, -3.0136743034853990e-23, -5.4777462560605053e-25], [-3.9786919980762183e-18, -6.8096408923293530e-21, 2.1411819856458402e-18, 1.4141899096207619e-18, 4.1758981355902233e-19, 6.5756555973581791e-20, 6.2504986643458699e-21, 4.5066417161803089e-22, 2.7278480290676432e-23, 1.0887031813001677e-24, 2.5714118748290228e-26], [-1.0045005357374392e-19, -2.7306182423935100e-21, 5.2836020782218118e-20, 3.6530969017340077e-20, 1.1115215147703134e-20, 1.6726480066218441e-21, 1.0511722913795223e-22, -1.7905419459503663e-24, -6.3549357371112902e-25, -3.6899723323539274e-26, -1.1285510419736925e-27], [4.3403016356812143e-21, -4.0232176266610829e-23, -2.3377021638229553e-21, -1.4851045134311726e-21, -4.0733446961774024e-22, -5.3139781767601361e-23, -2.6306621160230100e-24, 9.4146780196620701e-26, 1.9792080843245082e-26, 1.2360173189738400e-27, 4.6546445664411829e-29], [2.0991748680192144e-22, 4.3754728790645939e-24, -1.1116685459698879e-22, -7.6165333167057550e-23, -2.3202141505279418e-23, -3.6570005449932436e-24, -3.0707367709682287e-25, -1.5182576949495805e-26, -7.0478645090528197e-28, -3.9473239385635338e-29, -1.8056821122739310e-30]],
        [[6.8375973112501666e-2, 4.4297203314515614e-2, 1.8435206549371017e-2, 4.8412964333123267e-3, 7.7900914525930322e-4, 7.3424259303925082e-5, 3.7867527189641379e-6, 9.6122972511121162e-8, 1.0073830611730668e-9, 3.1356547159597867e-12, 1.3233187104077022e-15], [-1.5738974263360938e-3, -1.0539227856626001e-3, -4.6831415002766516e-4, -1.3552524560730105e-4, -2.4787697356392089e-5, -2.7409404234243010e-6, -1.7169447528668136e-7, -5.5234582021532355e-9, -7.7943782850125761e-11, -3.6328894914169238e-13, -3.0011396707006818e-16], [2.1552131663067440e-5, 1.8634539374709293e-5, 1.1826458450647784e-5, 4.8416852632779544e-6, 1.1977801050931781e-6, 1.7094627300742349e-7, 1.3298953994819191e-8, 5.1716054227018126e-10, 8.7110830051219737e-12, 4.9055348683751555e-14, 5.3643468041536992e-17], [-8.2365897547205678e-8, -3.5555818977893886e-7, -4.1526912602692420e-7, -2.2596716733094919e-7, -6.5627728423700502e-8, -1.0454220963302667e-8, -8.9164529152137207e-10, -3.8062018244624653e-11, -7.1753584508050061e-13, -4.7548452657271459e-15, -7.0709445636490893e-18], [1.0383769060420472e-9, 6.8422281499999294e-9, 8.8184732273557033e-9, 5.3079733347523130e-9, 1.7399413259742732e-9, 3.1985671341783623e-10, 3.2217518671152303e-11, 1.6668380819373395e-12, 3.9400875788175063e-14, 3.4607136427711287e-16, 7.7589664583911844e-19], [-6.3974714247232558e-10, -1.3293400002850724e-10, 1.4800223122723667e-10, 9.3427897290200759e-11, 1.6013958863540514e-11, -9.1293180103672255e-13, -5.3621542906055394e-13, -5.2583884488723059e-14, -1.8888927574867634e-15, -2.3519391438177511e-17, -7.8262678916935133e-20], [6.4878469592148415e-12, 2.1814852381554107e-12, 4.5713283693716364e-13, 1.0052648822345201e-12, 8.2705711768436312e-13, 2.7773198271694990e-13, 4.4426805202058105e-14, 3.4409751990947392e-15, 1.2117928989385509e-16, 1.6824184970922524e-18, 7.3440475474147131e-21], [2.3188399146393514e-12, -1.0826117870677772e-14, -1.3146532409191197e-12, -9.0461653017449258e-13, -2.8503459007332216e-13, -4.8440677262523968e-14, -4.6381944619867194e-15, -2.5256726946580020e-16, -7.5704589112900414e-18, -1.1026467954714746e-19, -6.2805814891227589e-22], [-2.4065788510213416e-14, 1.3483943125990296e-15, 1.4746835121913737e-14, 9.7628075848910756e-15, 3.1111954584855422e-15, 5.9110669769719376e-16, 7.4327230402192710e-17, 6.0987265248131763e-18, 2.8187198491754562e-19, 5.9933717872203868e-21, 4.9304101320010316e-23], [-9.1076088803789729e-15, -1.3848620010502231e-16, 4.8097586622381557e-15, 3.2203694678719415e-15, 9.4393442264469187e-16, 1.3720772286454837e-16, 9.2183463297256980e-18, 1.7307759572640563e-19, -7.3552577019268714e-21, -3.1511332513740060e-22, -3.6486064664044495e-24], [1.0385797512949855e-16, -4.3359275321385198e-18, -5.6529786218383800e-17, -3.2426905004143713e-17, -7.2961843248408608e-18, -4.9851820498581370e-19, 5.6479282253505620e-20, 1.1135629836427950e-20, 6.8307660319179835e-22, 1.9070451509531687e-23, 2.5620729121203274e-25], [3.5366091417432535e-17, 5.7432335966685792e-19, -1.8786785946358774e-17, -1.2739109400835221e-17, -3.8345680883387517e-18, -5.9431796599984187e-19, -4.8107100448773368e-20, -2.0330704184643888e-21, -5.0901989663116922e-23, -1.0454257349646764e-24, -1.6814662256942443e-26], [-4.3147308937375129e-19, 2.5678727313090116e-20, 2.3982618326584429e-19, 1.3458268013961953e-19, 3.0256443191889355e-20, 2.5964130721337000e-21, 9.8798066228540726e-24, -3.8532136015340523e-24, 4.7834801326765129e-25, 4.0279242311663197e-26, 1.0316051824575851e-27], [-1.3730960467860030e-19, -2.6723517178134366e-21, 7.2755834230938980e-20, 4.9649710564284583e-20, 1.5024534694804651e-20, 2.3281399600286470e-21, 1.8330119358829482e-22, 6.6236847837421657e-24, 6.9160635906833147e-26, -1.5896181332004560e-27, -6.0542614477755296e-29]],
        [[6.5397114810049972e-2, 4.2326114771536320e-2, 1.7579221484153794e-2, 4.6014885942420485e-3, 7.3686963567634289e-4, 6.8973467560181266e-5, 3.5216435511004841e-6, 8.8046523235955301e-8, 9.0005856996787035e-10, 2.6702531722353025e-12, 9.8067622429238576e-16], [-1.4059769573028861e-3, -9.2023612310848504e-4, -3.9106025477910862e-4, -1.0608006871739892e-4, -1.7862440793014033e-5, -1.7891649539830393e-6, -9.9964780904890293e-8, -2.8206101892846794e-9, -3.4114970936808149e-11, -1.3041921362831343e-13, -7.6579908652301945e-17], [2.0318175238708581e-5, 1.4945970201295683e-5, 7.7611979060732574e-6, 2.6860301530086925e-6, 5.8515174773805962e-7, 7.5713498427932550e-8, 5.4243609893488352e-9, 1.9481028787933311e-10, 2.9909920630854949e-12, 1.4658424520082815e-14, 1.1644772198237920e-17], [-1.4225720608723626e-7, -2.6458290624518908e-7, -2.5981303432486895e-7, -1.3164870316710195e-7, -3.6330462054893663e-8, -5.4945318825784075e-9, -4.3997579017472295e-10, -1.7253586608658404e-11, -2.8710410598061268e-13, -1.5434652526062359e-15, -1.4389522400222771e-18], [-6.3801421202280292e-9, 4.6880881146834748e-9, 9.7031093531320049e-9, 5.9009501184740250e-9, 1.7749847793264561e-9, 2.8491990743494658e-10, 2.4100773322121120e-11, 1.0054500716508229e-12, 1.8147069443698894e-14, 1.1042008236744371e-16, 1.3110842371342148e-19], [-9.2420677913328935e-12, -8.3840501430922040e-11, -1.1518431998580602e-10, -7.3694448887042945e-11, -2.5648610534210133e-11, -4.9740166420086002e-12, -5.2241925640883277e-13, -2.7704920382918073e-14, -6.5381416219410818e-16, -5.4491301076648254e-18, -9.9034498423107113e-21], [2.9573774087407152e-11, 1.7927924085380617e-12, -1.3445047338159311e-11, -8.8768342154785144e-12, -2.4600218512858408e-12, -3.2343138837777749e-13, -1.8085434955512145e-14, -1.8544075589895491e-16, 1.2322381382883789e-17, 2.3796660822144043e-19, 7.3202385721398026e-22], [-9.4703657836234286e-13, -3.1416621736634217e-14, 4.6183124913616677e-13, 2.9870789674969351e-13, 8.1195461794329083e-14, 1.0174138034157614e-14, 4.6940580787906130e-16, -6.6312769024798265e-18, -9.3865151018293388e-19, -1.5947278699720780e-20, -5.6890399225063503e-23], [-7.8214525641479407e-14, -1.1473846053152407e-15, 4.2253483340075469e-14, 2.9093488988494736e-14, 8.9966772127045004e-15, 1.4573388439563359e-15, 1.2597056755494660e-16, 5.6632463618609697e-18, 1.2546815496268400e-19, 1.2341179516246157e-21, 4.2115769750208440e-24], [5.8290004425668940e-15, 6.9453842617755988e-17, -3.1161057417928920e-15, -2.1008742189918160e-15, -6.2919992129960328e-16, -9.6989332272600068e-17, -7.7727505088171647e-18, -3.1399684832915851e-19, -6.2191104356864745e-21, -6.1104330484945611e-23, -2.6920139232526762e-25], [1.1416180759125965e-16, 4.8450550378058785e-18, -5.9387327611204168e-17, -4.2550454002293554e-17, -1.3559895317831901e-17, -2.2261154720002353e-18, -1.8507257036388560e-19, -6.8209136856640097e-21, -6.1774766975045680e-23, 1.1972572555883491e-24, 1.5224351700921370e-26], [-2.4869419576781587e-17, -4.5772461644250018e-19, 1.3181605938164058e-17, 8.9687815990705968e-18, 2.7036254059644338e-18, 4.1668060085698727e-19, 3.2597602571704967e-20, 1.1849470836705443e-21, 1.5635144077158535e-23, -4.3179717302529868e-27, -8.8164432981242469e-28], [3.1748134523199734e-19, -8.1375740095495630e-21, -1.7279618868956870e-19, -1.0544744834740293e-19, -2.7266433506252023e-20, -3.2250671904811191e-21, -1.3874623109936780e-22, 1.9855957375617567e-24, 2.7112051705501366e-25, 5.9323243132831925e-27, 5.6269847781458296e-29], [8.1936426981039670e-20, 2.2089338666400431e-21, -4.3217640368798643e-20, -3.0030591240268733e-20, -9.2922735175212579e-21, -1.4864336981066980e-21, -1.2321376607912205e-22, -4.9886721432727933e-24, -8.8628686302497731e-26, -6.4437420517583488e-28, -3.3597602871082090e-30]],
        [[6.2741189517218501e-2, 4.0595980793323406e-2, 1.6851010773173507e-2, 4.4068371869057743e-3, 7.0475058831859495e-4, 6.5840485705592233e-5, 3.3524236701882055e-6, 8.3472869148643597e-8, 8.4772887856072095e-10, 2.4847286005736948e-12, 8.8399566711697499e-16], [-1.2518156389000363e-3, -8.1220709579320848e-4, -3.3906302779279380e-4, -8.9474426289007260e-5, -1.4496840678517406e-5, -1.3792760696862132e-6, -7.2036844502286028e-8, -1.8597886317132456e-9, -1.9941668105670987e-11, -6.3978103396234449e-14, -2.7559861209519442e-17], [1.8085901840735517e-5, 1.2172349812148043e-5, 5.4578913417339636e-6, 1.5969871838057482e-6, 2.9520151680743113e-7, 3.2884478494576235e-8, 2.0617523253514010e-9, 6.5641195291406149e-11, 8.9798121281951119e-13, 3.8745011308177237e-15, 2.5117243590658414e-18], [-2.1891675007027638e-7, -2.0098861948954302e-7, -1.3468223508969272e-7, -5.6746628580741285e-8, -1.4150201153853630e-8, -2.0030693257410370e-9, -1.5220404434259969e-10, -5.6701097206668845e-12, -8.8634954190694619e-14, -4.3240072705126674e-16, -3.2292717767693751e-19], [-2.2791924278297198e-9, 3.3605409502344970e-9, 5.5841492324551638e-9, 3.2291861734132327e-9, 9.3686248717706370e-10, 1.4460163099231021e-10, 1.1638628825653926e-11, 4.5359104502183582e-13, 7.4035468338239888e-15, 3.8110952711678030e-17, 3.1462734412657526e-20], [2.8277320493803322e-10, -5.2780992615452975e-11, -2.2766000180886173e-10, -1.4751855171560596e-10, -4.4899085243611708e-11, -7.1632793535285278e-12, -5.9510128172409436e-13, -2.4074866465188100e-14, -4.1350547062017665e-16, -2.3078239091698322e-18, -2.2490270917313944e-21], [-3.5653837834092969e-12, 8.3487616167526982e-13, 3.2602799720544365e-12, 2.2244326753042103e-12, 7.3258511179975890e-13, 1.2945977435216667e-13, 1.2207591625179170e-14, 5.7670953312780611e-16, 1.2006147421925850e-17, 8.6071223841083263e-20, 1.2194421120765241e-22], [-7.2211630066798070e-13, -2.4725329371143069e-14, 3.5943209792516378e-13, 2.3993019464167040e-13, 6.9378169578092380e-14, 9.9670835725322361e-15, 6.9050416394504948e-16, 1.9780434622617273e-17, 1.2606113644975528e-19, -1.3248553804010582e-21, -5.7365956402113118e-24], [4.9410080926596874e-14, 1.0051577353086476e-15, -2.5812220372851846e-14, -1.7375230710169604e-14, -5.1378902967026692e-15, -7.6658983172860761e-16, -5.6721548811588818e-17, -1.8640613775332337e-18, -2.0104382803429957e-20, 1.0911248174545595e-23, 3.2958707471628638e-25], [-2.5985991322576553e-16, -1.8418220944879104e-18, 1.3250463205957905e-16, 8.2204637395256263e-17, 2.0892913411144194e-17, 2.1884287562111598e-18, 2.3481222623462229e-20, -1.0204974073471633e-20, -5.4516834877320676e-22, -7.8958966531218969e-24, -2.5354656729639823e-26], [-1.4361315212187517e-16, -2.9506568967967777e-18, 7.6159254307620562e-17, 5.2219797875632158e-17, 1.5923874559221838e-17, 2.5033642872931743e-18, 2.0353793882385188e-19, 8.0897769119647770e-21, 1.4114922939774666e-22, 9.1908501803945174e-25, 1.8119491626187720e-27], [8.0489672781140981e-18, 1.4339816437672813e-19, -4.2713968694719154e-18, -2.9058180063726844e-18, -8.7688110979365542e-19, -1.3574256557220249e-19, -1.0782051463707368e-20, -4.1350567717974612e-22, -6.8494260232199022e-24, -4.2566263582347473e-26, -9.4576300753103744e-29], [5.0113578644556908e-20, 3.6165701011295053e-21, -2.5665785823318540e-20, -1.9761829538969812e-20, -6.7959556458938324e-21, -1.2211882767202006e-21, -1.1391224852742021e-22, -5.0447965120620167e-24, -8.4102643830368001e-26, -1.3296070745851500e-28, 3.1376365567452141e-30], [-2.7753965428591748e-20, -6.9843797139472833e-22, 1.4654573013401470e-20, 1.0138062568073089e-20, 3.1195586501010553e-21, 4.9492789118523393e-22, 4.0464663237312584e-23, 1.5915199163705208e-24, 2.5869242669423939e-26, 1.2054789718493917e-28, -6.1010304460817564e-32]],
        [[6.0373739578998353e-2, 3.9061904058653054e-2, 1.6212298031324788e-2, 4.2389963487036725e-3, 6.7772087252266737e-4, 6.3290346540487688e-5, 3.2207754069152174e-6, 8.0129297145004257e-8, 8.1273297501969980e-10, 2.3767613515178940e-12, 8.4100769296150571e-16], [-1.1178790539119454e-3, -7.2363576137989664e-4, -3.0065337074999403e-4, -7.8742235991675656e-5, -1.2619606202300943e-5, -1.1825208552231029e-6, -6.0465156976061840e-8, -1.5146798207096223e-9, -1.5524644127853673e-11, -4.6215519243464872e-14, -1.7004314212591568e-17], [1.5399840288711921e-5, 1.0051290450523446e-5, 4.2470158869966774e-6, 1.1418567966848227e-6, 1.8987869674500231e-7, 1.8699244968879840e-8, 1.0212904960983974e-9, 2.7935729234093030e-11, 3.2308498591662775e-13, 1.1483905645457944e-15, 5.7399239854284106e-19], [-2.1882102294641653e-7, -1.5475256197495518e-7, -7.5572717156280188e-8, -2.4498101525637311e-8, -5.0247505795602655e-9, -6.1620955033440056e-10, -4.2013343237873240e-11, -1.4347415850710504e-12, -2.0752728803284282e-14, -9.3091881886806310e-17, -6.0718513402178042e-20], [1.6768335588533524e-9, 2.4657653155818536e-9, 2.2140877090135364e-9, 1.0775251275321544e-9, 2.8932375170917856e-10, 4.2629291090628534e-11, 3.3098864967330937e-12, 1.2449833992291776e-13, 1.9448317795948017e-15, 9.3479190293579504e-18, 6.6182424184377472e-21], [1.0076281751118456e-10, -3.7987701616819840e-11, -1.0493273114909575e-10, -6.4917724813721843e-11, -1.9228139569813082e-11, -2.9854181844006640e-12, -2.3984406502438570e-13, -9.2690833316015179e-15, -1.4872956667932342e-16, -7.4004531051614191e-19, -5.5952459663074774e-22], [-7.3465749754326177e-12, 4.9065730354683205e-13, 4.7538918536859556e-12, 3.1693601281437641e-12, 9.6637771780150668e-13, 1.5297789160854282e-13, 1.2516938755921818e-14, 4.9429258589476531e-16, 8.1713052351121457e-18, 4.2666151796544546e-20, 3.5726755919030913e-23], [2.0179055822108445e-13, -4.6354912351880002e-15, -1.2096315340562958e-13, -8.3291048326723963e-14, -2.6093695376035640e-14, -4.2664041006805071e-15, -3.6401309768324130e-16, -1.5207724983160687e-17, -2.7214522066907899e-19, -1.6036410673086975e-21, -1.6752532550630613e-24], [6.1287894938397557e-15, 1.8809881798228812e-16, -3.0324120989981341e-15, -1.9868634638168469e-15, -5.5879938405306960e-16, -7.6681913899701360e-17, -4.8719127269774290e-18, -1.1120265555179119e-19, 2.3898396885275532e-22, 2.0147953958172762e-23, 5.3541953459075037e-26], [-9.1878204227058606e-16, -1.7927840556264972e-17, 4.8363669732497681e-16, 3.2757356309790809e-16, 9.7929832606949239e-17, 1.4890412603502956e-17, 1.1410933457323713e-18, 4.0440918277727736e-20, 5.4647604980501810e-22, 1.6894666131093812e-24, -1.0743694976926329e-27], [4.1093319558263089e-17, 8.2392085229706483e-19, -2.1716997656906412e-17, -1.4795722021066896e-17, -4.4603413904128064e-18, -6.8634909122415063e-19, -5.3518015524836779e-20, -1.9477937462657572e-21, -2.7553612114777954e-23, -9.5302283534431373e-26, 4.3914422488041114e-29], [-1.2635229750139339e-19, -2.1900306025347988e-21, 6.6232524631413930e-20, 4.4110179425637933e-20, 1.2725239787385035e-20, 1.7840082062083560e-21, 1.1087190062378772e-22, 1.6841958772406337e-24, -6.8540596072471473e-26, -1.7016472307534257e-27, -6.3930500028334261e-30], [-9.7918947616482032e-20, -2.1626353716073500e-21, 5.1821004752557094e-20, 3.5604195604839677e-20, 1.0869080951767669e-20, 1.7073541212487602e-21, 1.3799828357169818e-22, 5.3785117184100369e-24, 8.8606083909624441e-26, 4.8756741387813189e-28, 6.0655362507119335e-31], [6.1821030833252178e-21, 1.3723225456894791e-22, -3.2707834746574352e-21, -2.2471585693780812e-21, -6.8583087797559356e-22, -1.0766196981853074e-22, -8.6885199308135353e-24, -3.3744460726220696e-25, -5.5123194331573574e-27, -2.9675311022332637e-29, -3.5107489561114230e-32]],
        [[5.8253254876443259e-2, 3.7689600127718871e-2, 1.5642437341820563e-2, 4.0898720571390382e-3, 6.5385041439000886e-4, 6.1057367376334400e-5, 3.1068703676813982e-6, 7.7285727323486379e-8, 7.8374028957576195e-10, 2.2912188576266394e-12, 8.1014371978873417e-16], [-1.0046266082880555e-3, -6.5003664662168142e-4, -2.6982769539896461e-4, -7.0566118893168185e-5, -1.1285378673176415e-5, -1.0543567677833891e-6, -5.3686920968017379e-8, -1.3368028125583611e-9, -1.3576149094781176e-11, -3.9786323239801651e-14, -1.4140941949769160e-17], [1.2975998379898814e-5, 8.4078702042127713e-6, 3.5002387362403705e-6, 9.1961552069034119e-7, 1.4805035983710595e-7, 1.3960322897170069e-8, 7.2001158935178464e-10, 1.8255655561178681e-11, 1.9043510240007487e-13, 5.8298001631127275e-16, 2.2627220593770210e-19], [-1.8341881305235107e-7, -1.2077601639718107e-7, -5.1934410315437981e-8, -1.4331198749594286e-8, -2.4660777261015838e-9, -2.5329684442873307e-10, -1.4537894945657393e-11, -4.2092203185532379e-13, -5.1888481711934364e-15, -1.9784249301586497e-17, -1.0629805931449456e-20], [2.4089430551433300e-9, 1.8149895694813144e-9, 9.7378770773042760e-10, 3.4651066813830919e-10, 7.6818757602422862e-11, 1.0001373014345582e-11, 7.1258686901414340e-13, 2.5100118620945503e-14, 3.7022144831507156e-16, 1.6721957662482621e-18, 1.0711616645719892e-21], [-6.0427100231312375e-12, -2.7483976767313076e-11, -3.1704412587746796e-11, -1.6767084906772702e-11, -4.6628896826004663e-12, -6.9829802390796709e-13, -5.4584562275176545e-14, -2.0537953297618124e-15, -3.1890297775801806e-17, -1.5084410358667051e-19, -1.0218325004257277e-22], [-1.9665719519048027e-12, 3.8706020533933680e-13, 1.5917526183268601e-12, 1.0156122672598851e-12, 3.0313275636325101e-13, 4.7087318042271759e-14, 3.7687556645656807e-15, 1.4450185459606920e-16, 2.2864922508057849e-18, 1.1083325051456757e-20, 7.8591372323913976e-24], [1.2954434782699740e-13, -3.7654364507906677e-15, -7.7285823646480484e-14, -5.2065386526388667e-14, -1.5854909509885804e-14, -2.4948011448686537e-15, -2.0205532440373273e-16, -7.8543308961874981e-18, -1.2663914574983361e-19, -6.3272382284866091e-22, -4.7827617969511625e-25], [-4.8493204538683982e-15, -2.1327123653853229e-17, 2.7001761550927437e-15, 1.8565289860568720e-15, 5.7261155479305650e-16, 9.1343270388525051e-17, 7.5275286128925034e-18, 2.9964804086699808e-19, 5.0026160215207681e-21, 2.6451920012240896e-23, 2.2429962849827243e-26], [5.6427130775203547e-17, 1.0156837108362777e-18, -3.1652661314596554e-17, -2.2788282473318597e-17, -7.4358182426026875e-18, -1.2745029406544143e-18, -1.1502207919990191e-19, -5.1367030246000232e-21, -9.9459453306850613e-23, -6.4287216257538293e-25, -7.4324817895210047e-28], [6.6122130592974560e-18, 1.0722646768024411e-19, -3.4839316203099656e-18, -2.3381187102813058e-18, -6.9070372252116131e-19, -1.0321913547357682e-19, -7.7032128374400358e-21, -2.6118990368214664e-22, -3.2273809378890888e-24, -7.1552835612976657e-27, 1.1629564202252279e-29], [-5.5297446124564887e-19, -1.0826510724834870e-20, 2.9262888720757680e-19, 1.9940176887426738e-19, 6.0165831718455801e-20, 9.2781165159905822e-21, 7.2703881647269505e-22, 2.6779800827742794e-23, 3.9201140188740419e-25, 1.5729417163953955e-27, 3.6375462001150622e-31], [2.1652823106287819e-20, 4.7355950105014726e-22, -1.1452698535746038e-20, -7.8546939161312944e-21, -2.3894817464208761e-21, -3.7270109047032468e-22, -2.9685264593582915e-23, -1.1204583731367578e-24, -1.7069866366101517e-26, -7.4171176144896090e-29, -2.6006223667595938e-32], [-2.3413566210886992e-22, -6.6089869028400643e-24, 1.2333001329140101e-22, 8.5834790638033725e-23, 2.6557129029361375e-23, 4.2319999512124600e-24, 3.4621914923242233e-25, 1.3489250063947781e-26, 2.1185549694538047e-28, 8.9908373769946390e-31, -1.5650431752054185e-34]],
        [[5.6341288739713946e-2, 3.6452523201208040e-2, 1.5128972206061131e-2, 3.9556060716739034e-3, 6.3238166818176468e-4, 5.9052124044778776e-5, 3.0048016517673676e-6, 7.4745519946245552e-8, 7.5796266924309698e-10, 2.2157726748796536e-12, 7.8340245660497645e-16], [-9.0898837814245929e-4, -5.8811593468664402e-4, -2.4409147660973377e-4, -6.3821739086732553e-5, -1.0203584854927593e-5, -9.5287072866378632e-7, -4.8489631649381840e-8, -1.2063329871196984e-9, -1.2234958321602943e-11, -3.5776546105662147e-14, -1.2656046858213727e-17], [1.0996621038118315e-5, 7.1161925005275109e-6, 2.9546795309189964e-6, 7.7303732672897378e-7, 1.2370304071228669e-7, 1.1566807417874585e-8, 5.8965079447445444e-10, 1.4706157966733929e-11, 1.4970960093433715e-13, 4.4044394085684101e-16, 1.5775357028431901e-19], [-1.4745453568698043e-7, -9.5665543454344623e-8, -3.9930022816335063e-8, -1.0533699411285708e-8, -1.7056886253001436e-9, -1.6210955686678284e-10, -8.4497973162927728e-12, -2.1732427213905149e-13, -2.3123987759412176e-15, -7.2877392858594832e-18, -2.9677024179385014e-21], [2.0309922060241696e-9, 1.3494616856940881e-9, 5.9046862819112100e-10, 1.6700838136020613e-10, 2.9626765940765275e-11, 3.1500768528294843e-12, 1.8761832548753145e-13, 5.6417792543873713e-15, 7.2165022786184017e-17, 2.8450933903299023e-19, 1.5630546839166558e-22], [-2.4425521333824031e-11, -1.9490109505043245e-11, -1.1255914552965937e-11, -4.2601645017675880e-12, -9.8714702128360255e-13, -1.3240729632903458e-13, -9.6165652523920744e-15, -3.4252802321213739e-16, -5.0726700912740751e-18, -2.2805927681479195e-20, -1.4268751049661239e-23], [-3.9761124092556289e-14, 2.7975131966262567e-13, 3.7876330359062190e-13, 2.0847235128782414e-13, 5.8826839761322588e-14, 8.8571570895409895e-15, 6.9271770177571152e-16, 2.5980828065773046e-17, 4.0036774810159165e-19, 1.8650773234437510e-21, 1.2176870556866297e-24], [2.5882979510915641e-14, -3.6351835824598904e-15, -1.9055830409135388e-14, -1.2310128056230796e-14, -3.6810725728444500e-15, -5.7081765292773001e-16, -4.5492780231551159e-17, -1.7318073049355211e-18, -2.7082345512691593e-20, -1.2853943227757176e-22, -8.6792635537684782e-26], [-1.6407274946231393e-15, 2.6028610748400234e-17, 9.4880852634492048e-16, 6.4101149690444532e-16, 1.9476529856913744e-16, 3.0501284987668958e-17, 2.4521291993983511e-18, 9.4266398032686252e-20, 1.4936420515171066e-21, 7.2379228117463877e-24, 5.1008172606398188e-27], [7.0048445157714391e-17, 7.4757148493849009e-19, -3.8245244952373078e-17, -2.6232434329397617e-17, -8.0350978524135448e-18, -1.2683265012103910e-18, -1.0295775017730779e-19, -4.0102013513224447e-21, -6.4777000849260386e-23, -3.2400160618387347e-25, -2.4381639162261256e-28], [-1.9255426975517028e-18, -3.9962073913365668e-20, 1.0337605016892451e-18, 7.1783806620396286e-19, 2.2254835817919894e-19, 3.5672950123577244e-20, 2.9560430478467767e-21, 1.1846591528200812e-22, 1.9943788622067359e-24, 1.0650451892342644e-26, 9.0865021482209881e-30], [5.5144784189395087e-21, 5.2101773418114909e-22, -3.0001886244417013e-21, -2.5640369637375607e-21, -9.8167088431480287e-22, -1.9746762597158120e-22, -2.0851618793823535e-23, -1.0827185281838940e-24, -2.4166495313005105e-26, -1.7802042361060543e-28, -2.2906548366203145e-31], [2.9793884464288404e-21, 4.6554529319900273e-23, -1.5797181021657289e-21, -1.0656323962525117e-21, -3.1744584347072807e-22, -4.8066560567515685e-23, -3.6652051697788960e-24, -1.2924718586906023e-25, -1.7469873623600856e-27, -5.7225287599460633e-30, 1.0590477594264780e-33], [-1.9827478325237874e-22, -3.9503718243687364e-24, 1.0501545464313237e-22, 7.1703070059480423e-23, 2.1696670557428290e-23, 3.3599319390461198e-24, 2.6499729832728915e-25, 9.8667619393012466e-27, 1.4748617234514173e-28, 6.2630805037760402e-31, 2.5001688058526232e-34]],
        [[5.4606047483022129e-2, 3.5329826541314919e-2, 1.4663013032564926e-2, 3.8337752475070707e-3, 6.1290423835691608e-4, 5.7233263699223765e-5, 2.9122475846339930e-6, 7.2443085532018322e-8, 7.3461287466368486e-10, 2.1475051261112403e-12, 7.5925995758311898e-16], [-8.2757738299997226e-4, -5.3543870623237692e-4, -2.2222467251438412e-4, -5.8102786677312594e-5, -9.2889098555607233e-6, -8.6740744747029559e-7, -4.4137363596809148e-8, -1.0979432275690537e-9, -1.1133932417459546e-11, -3.2548846717431068e-14, -1.1508375196648327e-17], [9.4063245348711067e-6, 6.0859825145332607e-6, 2.5259979474032590e-6, 6.6049411319162018e-7, 1.0560433929251758e-7, 9.8628561511101522e-9, 5.0196368413611465e-10, 1.2490136543119823e-11, 1.2671101107827735e-13, 3.7067087856949432e-16, 1.3122986201765932e-19], [-1.1875400076701127e-7, -7.6860470050668590e-8, -3.1922902180569513e-8, -8.3561819096040289e-9, -1.3381253144780613e-9, -1.2524392602218874e-10, -6.3932654880177971e-12, -1.5974960042213953e-13, -1.6306667826404943e-15, -4.8177632515362994e-18, -1.7392690597109099e-21], [1.5690591197630843e-9, 1.0191117930789326e-9, 4.2633888359319827e-10, 1.1286764606211437e-10, 1.8366738845042717e-11, 1.7571061059229036e-12, 9.2376713164966519e-14, 2.4025017666149220e-15, 2.5939574027771147e-17, 8.3372447641841611e-20, 3.4897667312083079e-23], [-2.0776057205950493e-11, -1.3888033131200348e-11, -6.1463907341428600e-12, -1.7655711992033858e-12, -3.1892311532314784e-13, -3.4566557822270357e-14, -2.0981108002368168e-15, -6.4200008929483887e-17, -8.3325983550182628e-19, -3.3165891193331050e-21, -1.8175415463542041e-24], [2.3325556769659565e-13, 1.9183200623601140e-13, 1.1472301295354301e-13, 4.4568905735817687e-14, 1.0501766838264852e-14, 1.4225952124440995e-15, 1.0383420233752406e-16, 3.7020338014909928e-18, 5.4653847844753098e-20, 2.4346467914166259e-22, 1.4872601429147406e-25], [7.4981526868488635e-16, -2.6171773893433274e-15, -3.7502977025056067e-15, -2.0881472395674924e-15, -5.9103303548005959e-16, -8.8962263174440705e-17, -6.9405179706577352e-18, -2.5908321364857227e-19, -3.9609405594223622e-21, -1.8194122940062789e-23, -1.1515016539285333e-26], [-2.5395272235034420e-16, 3.2054050262760976e-17, 1.8210442677389004e-16, 1.1792099859740750e-16, 3.5223533089343063e-17, 5.4471764584032065e-18, 4.3224650395943810e-19, 1.6347393987715608e-20, 2.5305466301648180e-22, 1.1801641784565584e-24, 7.6657840536340238e-28], [1.5732661794213350e-17, -1.9310899163217913e-19, -9.0085262974997015e-18, -6.0829054636886976e-18, -1.8435005494540417e-18, -2.8753108457870014e-19, -2.2979488154091818e-20, -8.7576839670689896e-22, -1.3692173414963071e-23, -6.4839487992531899e-26, -4.3419236239593680e-29], [-7.0875971949516929e-19, -8.4480008143189597e-21, 3.8469344727347656e-19, 2.6318725230493738e-19, 8.0259714142328257e-20, 1.2588077194559875e-20, 1.0126207535499493e-21, 3.8926876997734069e-23, 6.1628547130580164e-25, 2.9787240924414985e-27, 2.0799388368985591e-30], [2.4354448348452212e-20, 4.8720788469085295e-22, -1.3009228009585650e-20, -8.9658137385342915e-21, -2.7507675403885143e-21, -4.3461890255628580e-22, -3.5305389415784877e-23, -1.3758144446464108e-24, -2.2223955833527521e-26, -1.1098614857510893e-28, -8.2752969361560951e-32], [-5.4668056488871392e-22, -1.4344919336502444e-23, 2.9005638952136047e-22, 2.0226403188539850e-22, 6.2883273046276915e-23, 1.0109559338603041e-23, 8.4060699084222510e-25, 3.3822690401599209e-26, 5.7188946094225884e-28, 3.0645287767935001e-30, 2.5996825254632515e-33], [-4.5016108080805097e-25, 1.4341294041691689e-25, 2.6687745504204336e-25, 3.3899950351443308e-26, -4.6516884037577565e-26, -1.9575472800923958e-26, -2.9661602751498620e-27, -1.9200118397565117e-28, -4.9584682315756939e-30, -4.0244081930768433e-32, -5.4349085469784244e-35]],
        [[5.3021912340129055e-2, 3.4304898997805918e-2, 1.4237634825689779e-2, 3.7225561856105719e-3, 5.9512365472156007e-4, 5.5572900798397278e-5, 2.8277616630278492e-6, 7.0341460892183087e-8, 7.1330108593255373e-10, 2.0852033250490117e-12, 7.3723238590372692e-16], [-7.5762981140455447e-4, -4.9018255044612560e-4, -2.0344153445522658e-4, -5.3191611306455048e-5, -8.5037259979909954e-6, -7.9408196704670442e-7, -4.0405954716426496e-8, -1.0051118107913122e-9, -1.0192400691599100e-11, -2.9795657386017950e-14, -1.0534423659486939e-17], [8.1191704386400945e-6, 5.2530725318669907e-6, 2.1802039575005731e-6, 5.7003789065780055e-7, 9.1132703344672714e-8, 8.5101347566296112e-9, 4.3303685579990682e-10, 1.0772228386597614e-11, 1.0924074287997554e-13, 3.1936545943336507e-16, 1.1292676336686456e-19], [-9.6673303693977607e-8, -6.2549546244279862e-8, -2.5962145367579422e-8, -6.7888901116611209e-9, -1.0855340505234487e-9, -1.0139307723248243e-10, -5.1610482489656066e-12, -1.2844462750111829e-13, -1.3034151356808229e-15, -3.8145469804106320e-18, -1.3515481911916580e-21], [1.2081255824553322e-9, 7.8202107792825429e-10, 3.2488057669292552e-10, 8.5073751374234008e-11, 1.3630802350221179e-11, 1.2767487041894795e-12, 6.5239353394422001e-14, 1.6323913663391817e-15, 1.6695136193082163e-17, 4.9468393513178174e-20, 1.7947344339633782e-23], [-1.5472850020779011e-11, -1.0055448976291538e-11, -4.2115106065528687e-12, -1.1169220930073101e-12, -1.8219758080235658e-13, -1.7485572729574261e-14, -9.2292375856317298e-16, -2.4120198246596774e-17, -2.6195117650565896e-19, -8.4761078095389787e-22, -3.5693982318508482e-25], [1.9659589315832382e-13, 1.3159076930558513e-13, 5.8378262595661261e-14, 1.6821376500137522e-14, 3.0485759627723723e-15, 3.3141719682613503e-16, 2.0160925343808288e-17, 6.1742739897958821e-19, 8.0025540970692824e-21, 3.1678189461715691e-23, 1.7089107401174722e-26], [-2.1239393049255533e-15, -1.7365947674438621e-15, -1.0313714202308368e-15, -3.9837641024037111e-16, -9.3429198086760345e-17, -1.2602054422624813e-17, -9.1567963695465569e-19, -3.2470597566099833e-20, -4.7585091600973316e-22, -2.0954360465367723e-24, -1.2508070488483299e-27], [-4.3016594645563380e-18, 2.2615523123038997e-17, 3.1171766389145209e-17, 1.7189189668548809e-17, 4.8406574327105890e-18, 7.2560617294395228e-19, 5.6358089607793275e-20, 2.0920215134939619e-21, 3.1729847337434959e-23, 1.4388287465401122e-25, 8.8679883020207106e-29], [1.9456441265671345e-18, -2.6687391339201384e-19, -1.4205710626595218e-18, -9.1570488881325332e-19, -2.7268848598058618e-19, -4.2028416305772518e-20, -3.3206382898957698e-21, -1.2483301213885670e-22, -1.9151706565142868e-24, -8.7995292775236844e-27, -5.5387100622122303e-30], [-1.1912410465754372e-19, 1.6777969683860771e-21, 6.8376030829860379e-20, 4.6053794651899370e-20, 1.3918797566792712e-20, 2.1630190082405587e-21, 1.7200199074513413e-22, 6.5082663980857667e-24, 1.0065387017045798e-25, 4.6800162752634031e-28, 3.0136615898546452e-31], [5.4634447747861357e-21, 6.1138880703779796e-23, -2.9640924916410099e-21, -2.0225411983086807e-21, -6.1466981913665580e-22, -9.5951846932674965e-23, -7.6679253457029895e-24, -2.9199127290608582e-25, -4.5568150244763728e-27, -2.1496499392444910e-29, -1.4249448380792960e-32], [-2.0450200184986602e-22, -3.8578309178341083e-24, 1.0916283810782390e-22, 7.4921944170316700e-23, 2.2863216293136925e-23, 3.5857878434383161e-24, 2.8830831420974179e-25, 1.1071554200598578e-26, 1.7493652527058727e-28, 8.4202474153746961e-31, 5.8113354907867979e-34], [6.0559887311360444e-24, 1.3782529071381674e-25, -3.2133074029250198e-24, -2.2174300585167351e-24, -6.8048574664285614e-25, -1.0750458874689306e-25, -8.7292416721329347e-27, -3.3985894911802065e-28, -5.4792942568749550e-30, -2.7240278095973887e-32, -2.0025071901719427e-35]],
        [[5.1568149939996389e-2, 3.3364322322361864e-2, 1.3847265269774941e-2, 3.6204905836694833e-3, 5.7880646276394141e-4, 5.4049194111933064e-5, 2.7502296176323100e-6, 6.8412826057238424e-8, 6.9374365641319162e-10, 2.0280307552326420e-12, 7.1701874753012688e-16], [-6.9701010890852360e-4, -4.5096188460517628e-4, -1.8716366733078303e-4, -4.8935605394775355e-5, -7.8233169886600289e-6, -7.3054470318514765e-7, -3.7172909290657996e-8, -9.2468787104938382e-10, -9.3768442458791193e-12, -2.7411467530820936e-14, -9.6914418782179506e-18], [7.0656345685074380e-6, 4.5714293753995469e-6, 1.8972907706433248e-6, 4.9606385144242666e-7, 7.9305612903118538e-8, 7.4056012169275154e-9, 3.7682594589829477e-10, 9.3736860495204596e-12, 9.5054652257904484e-14, 2.7787609606187471e-16, 9.8245219037312138e-20], [-7.9582508612044889e-8, -5.1489656011542400e-8, -2.1370023733116130e-8, -5.5874497474159796e-9, -8.9327885071539350e-10, -8.3416739060679956e-11, -4.2447003162857303e-12, -1.0559300676843979e-13, -1.0708406304364044e-15, -3.1307211145745304e-18, -1.1070893528923351e-21], [9.4113878252014261e-10, 6.0894221972708939e-10, 2.5275652828929008e-10, 6.6096138626275735e-11, 1.0569217552185945e-11, 9.8727438778090150e-13, 5.0258352852017524e-14, 1.2509553999318342e-15, 1.2696578185965496e-17, 3.7167534829479583e-20, 1.3175084449585804e-23], [-1.1442877554281098e-11, -7.4073199404355241e-12, -3.0775570537156767e-12, -8.0600835656402103e-13, -1.2916698339580516e-13, -1.2101806817746256e-14, -6.1859092381136411e-16, -1.5484958207171239e-17, -1.5846065473787721e-19, -4.6986016245095041e-22, -1.7059595911081811e-25], [1.4121438421328979e-13, 9.1764081189500503e-14, 3.8426415859800380e-14, 1.0187875238516489e-14, 1.6611244876353656e-15, 1.5930802681149897e-16, 8.3997755696945158e-18, 2.1916614791931764e-19, 2.3738152901904084e-21, 7.6437048259781067e-24, 3.1836533800584354e-27], [-1.7246238619626145e-15, -1.1508128141762345e-15, -5.0756802190046846e-16, -1.4508255426568256e-16, -2.6042024944924707e-17, -2.8009992568596780e-18, -1.6845041469396675e-19, -5.0959212576636968e-21, -6.5157338830219793e-23, -2.5369950293368359e-25, -1.3348405000011022e-28], [1.8371190935110880e-17, 1.4516919382593976e-17, 8.2777105156075997e-18, 3.0961640156415270e-18, 7.0975913696381892e-19, 9.4180098709627063e-20, 6.7572864077344060e-21, 2.3701186246559255e-22, 3.4352858179841688e-24, 1.4923554284115744e-26, 8.7091591833701642e-30], [-1.4581194925896209e-20, -1.8109923485875308e-19, -2.2224962280315003e-19, -1.1902364464266439e-19, -3.3091271798176119e-20, -4.9213900973182579e-21, -3.7981138625127438e-22, -1.4006809263378996e-23, -2.1073123854035827e-25, -9.4421073102227255e-28, -5.6872068649301094e-31], [-1.1911188807013836e-20, 2.0882337420290762e-21, 9.2653310171726514e-21, 5.9052064634093640e-21, 1.7496514062972010e-21, 2.6857390880554076e-22, 2.1126257459791126e-23, 7.8973708768716641e-25, 1.2019358165668792e-26, 5.4517869180904880e-29, 3.3432670282028297e-32], [7.3445003833149950e-22, -1.5243391478427784e-23, -4.2722204209249858e-22, -2.8650145372891097e-22, -8.6328127018679610e-23, -1.3369926766616365e-23, -1.0584632674448823e-24, -3.9804647251311025e-26, -6.1000513392816485e-28, -2.7939234375547317e-30, -1.7441123368519882e-33], [-3.3747856039024840e-23, -3.0725827983437825e-25, 1.8367485597896725e-23, 1.2497692072476845e-23, 3.7870149632953550e-24, 5.8889755720718763e-25, 4.6814434843736092e-26, 1.7694198612930400e-27, 2.7306123302639443e-29, 1.2643968607268471e-31, 8.0626225249442031e-35], [1.3048168030478044e-24, 2.2831487011543163e-26, -6.9717227837366379e-25, -4.7700356454834483e-25, -1.4501897251711629e-25, -2.2629551207134435e-26, -1.8068011719488662e-27, -6.8696593761505976e-29, -1.0693159923319936e-30, -5.0204168632230165e-33, -3.2899997820962615e-36]],
        [[5.0227800602943264e-2, 3.2497123334626371e-2, 1.3487349837480457e-2, 3.5263874940273544e-3, 5.6376223716085397e-4, 5.2644357890796405e-5, 2.6787461785617410e-6, 6.6634652987506327e-8, 6.7571200335262943e-10, 1.9753185621120913e-12, 6.9838212895204392e-16], [-6.4406527658266679e-4, -4.1670685331561798e-4, -1.7294672693782006e-4, -4.5218459019358449e-5, -7.2290579848461143e-6, -6.7505251643359145e-7, -3.4349252764298599e-8, -8.5444846135263986e-10, -8.6645770646894966e-12, -2.5329282332301459e-14, -8.9552737621029284e-18], [6.1939959345018582e-6, 4.0074829177234648e-6, 1.6632341647563075e-6, 4.3486737722055964e-7, 6.9522088326329774e-8, 6.4920028588537736e-9, 3.3033796679748760e-10, 8.2172622264768432e-12, 8.3327576714267489e-14, 2.4359279326543526e-16, 8.6123311472340589e-20], [-6.6186257107979630e-8, -4.2822174417113570e-8, -1.7772589142422419e-8, -4.6468061334443102e-9, -7.4288422367458542e-10, -6.9370984105014836e-11, -3.5298704738316648e-12, -8.7806966616032060e-14, -8.9041566968480987e-16, -2.6029863254238111e-18, -9.2031052701997049e-22], [7.4259435004171754e-10, 4.8045687168177330e-10, 1.9940693127878688e-10, 5.2137496155861006e-11, 8.3353805362832330e-12, 7.7838434573924769e-13, 3.9608763564852144e-14, 9.8533512961832655e-16, 9.9926343957394220e-18, 2.9215203881582393e-20, 1.0331492187666378e-23], [-8.5693935959790504e-12, -5.5446449561135150e-12, -2.3014553184665174e-12, -6.0183871367752916e-13, -9.6239247365281928e-14, -8.9898875668836555e-15, -4.5765007346281619e-16, -1.1391426967749104e-17, -1.1562085807274806e-19, -3.3847569395150173e-22, -1.1998389488799557e-25], [1.0068043288180099e-13, 6.5171421230920201e-14, 2.7075321994368060e-14, 7.0902446240647673e-15, 1.1360717318773803e-15, 1.0641627550816798e-16, 5.4377997769309210e-18, 1.3605860708265963e-19, 1.3912948997778235e-21, 4.1201420669289091e-24, 1.4917404775273515e-27], [-1.1947444388682030e-15, -7.7590719177935321e-16, -3.2451670970570267e-16, -8.5874576053114676e-17, -1.3964236731587676e-17, -1.3343724386838287e-18, -7.0017852172373014e-20, -1.8151061342756408e-21, -1.9484682855670688e-23, -6.1919242818734138e-26, -2.5209277634922783e-29], [1.4050880257315635e-17, 9.3217597583098103e-18, 4.0662742606004983e-18, 1.1446396178192969e-18, 2.0170258001630382e-19, 2.1253191639104315e-20, 1.2505343740578606e-21, 3.6979994575858911e-23, 4.6168709582119816e-25, 1.7509926099059636e-27, 8.9069492110490336e-31], [-1.4917397023874366e-19, -1.1250607155831196e-19, -6.0374139440222377e-20, -2.1435692815653756e-20, -4.7261347097215144e-21, -6.0955918265928393e-22, -4.2810515141980744e-23, -1.4759669205782038e-24, -2.1065081436956009e-26, -9.0023342732908774e-29, -5.1331467430114667e-32], [5.7235954546664008e-22, 1.3473604582363907e-21, 1.3955359001774603e-21, 7.1064255584824436e-22, 1.9323188534061883e-22, 2.8375292555183451e-23, 2.1701696429798922e-24, 7.9397002383784886e-26, 1.1842448300654957e-27, 5.2451905016352172e-30, 3.0953179740312786e-33], [5.8370967904466758e-23, -1.5251283552833256e-23, -5.1740698985344425e-23, -3.2323220720239725e-23, -9.5027466084073005e-24, -1.4511945955725913e-24, -1.1360834405965408e-25, -4.2235684017467145e-27, -6.3808865783311485e-29, -2.8616099313098514e-31, -1.7166788334269087e-34], [-3.7661838752259070e-24, 1.2821122451645914e-25, 2.2517666169664648e-24, 1.4998664653002068e-24, 4.5033995898022286e-25, 6.9510213738128962e-26, 5.4805987425685428e-27, 2.0498612111135574e-28, 3.1167819685320015e-30, 1.4095562735192377e-32, 8.5792838580200284e-36], [1.7238298377944206e-25, 9.3048256791100184e-28, -9.4498683216363107e-26, -6.4088314545947343e-26, -1.9366766774981725e-26, -3.0016013274046519e-27, -2.3755585981478675e-28, -8.9232867835730677e-30, -1.3644885294231246e-31, -6.2242158405157563e-34, -3.8504292098697870e-37]],
        [[4.8986841435955601e-2, 3.1694229267465967e-2, 1.3154123014323872e-2, 3.4392623792534694e-3, 5.4983357794666818e-4, 5.1343693757638992e-5, 2.6125634151729295e-6, 6.4988335946553614e-8, 6.5901744369643996e-10, 1.9265151168972542e-12, 6.8112746688266596e-16], [-5.9750048926824373e-4, -3.8657968017030366e-4, -1.6044298238653282e-4, -4.1949243806695426e-5, -6.7064097687734967e-6, -6.2624740150014239e-7, -3.1865861816446694e-8, -7.9267332676130621e-10, -8.0381431858247442e-12, -2.3498018935550801e-14, -8.3078227598873334e-18], [5.4657903697328640e-6, 3.5363376820843630e-6, 1.4676937117658909e-6, 3.8374156752954867e-7, 6.1348619813763650e-8, 5.7287602944315003e-9, 2.9150122641691510e-10, 7.2511847033809697e-12, 7.3530999424097683e-14, 2.1495422795030209e-16, 7.5997968862338509e-20], [-5.5555084385538322e-8, -3.5943848850459057e-8, -1.4917852362859203e-8, -3.9004053993556571e-9, -6.2355640806804906e-10, -5.8227971947520248e-11, -2.9628624205535728e-12, -7.3702154692932505e-14, -7.4738065510898955e-16, -2.1848298907117925e-18, -7.7245657630187127e-22], [5.9290247294722012e-10, 3.8360493589313785e-10, 1.5920849431955122e-10, 4.1626527829174516e-11, 6.6548291252822811e-12, 6.2143229473425117e-13, 3.1620955412389829e-14, 7.8658477362101367e-16, 7.9764533306434976e-18, 2.3317909510040108e-20, 8.2442900642328717e-24], [-6.5084130353457672e-12, -4.2109291571052212e-12, -1.7476879714864072e-12, -4.5695559723455275e-13, -7.3054926588644700e-14, -6.8221062589710808e-15, -3.4714909517583419e-16, -8.6359300944693735e-18, -8.7580114832071305e-20, -2.5605573456210793e-22, -9.0549751427025391e-26], [7.2764314744204823e-14, 4.7080385432465328e-14, 1.9541796966123272e-14, 5.1101681777722034e-15, 8.1714153386848168e-16, 7.6328237705836686e-17, 3.8854801364238288e-18, 9.6707636683405914e-20, 9.8146684755022170e-22, 2.8727294635844983e-24, 1.0179828260060540e-27], [-8.2380816680849904e-16, -5.3321479383480009e-16, -2.2148500751633421e-16, -5.7984836663440376e-17, -9.2873057424574392e-18, -8.6947462794157551e-19, -4.4396353568154898e-20, -1.1096695497584699e-21, -1.1329653435729761e-23, -3.3468473654511057e-26, -1.2059467441655502e-29], [9.3956249623307079e-18, 6.0966962233349950e-18, 2.5455060607149709e-18, 6.7179672122041821e-19, 1.0883098040957193e-19, 1.0346841896808192e-20, 5.3928774855050844e-22, 1.3855886904575771e-23, 1.4693988213087123e-25, 4.5881710051927522e-28, 1.8142717826757770e-31], [-1.0650969332822011e-19, -7.0199750728163521e-20, -3.0236061657536807e-20, -8.3591641178840268e-21, -1.4403443681030339e-21, -1.4789928791818748e-22, -8.4590006027115841e-24, -2.4266044564018033e-25, -2.9329981301361875e-27, -1.0735271968168279e-29, -5.2286043060131495e-33], [1.1262094655037731e-21, 8.1149340888722508e-22, 4.0760735786668257e-22, 1.3577671545515914e-22, 2.8407129590906804e-23, 3.5176615035527254e-24, 2.3937872692323345e-25, 8.0470648343499693e-27, 1.1238807908701936e-28, 4.7034731343943624e-31, 2.6138070489833079e-34], [-7.0748121974278625e-24, -9.3387720824515078e-24, -7.9478988235967940e-24, -3.7588973713030077e-24, -9.8708593995704402e-25, -1.4211447366109944e-25, -1.0726403549868135e-26, -3.8834377155744448e-28, -5.7346091308985118e-30, -2.5099111530587907e-32, -1.4533070547503382e-35], [-2.2022996147903839e-25, 1.0358691727318338e-25, 2.5355482694802488e-25, 1.5329486363030219e-25, 4.4523241697939864e-26, 6.7514358202339027e-27, 5.2557202650252758e-28, 1.9426997832383589e-29, 2.9143343523850097e-31, 1.2936123788193002e-33, 7.6145148204561865e-37], [1.6226530737151118e-26, -9.6126927341743972e-28, -1.0212329151455989e-26, -6.7291754542108313e-27, -2.0111196586438863e-27, -3.0928658924317434e-28, -2.4289675415964452e-29, -9.0397223067742361e-31, -1.3649320245498164e-32, -6.1057307247216457e-35, -3.6385431090080135e-38]],
        [[4.7833563368938421e-2, 3.0948064411880565e-2, 1.2844440635971619e-2, 3.3582931688949960e-3, 5.3688906085891975e-4, 5.0134929237057089e-5, 2.5510568554915001e-6, 6.3458340945910881e-8, 6.4350245351068899e-10, 1.8811599242137859e-12, 6.6509194904615789e-16], [-5.5628885381940736e-4, -3.5991596835175283e-4, -1.4937668566035989e-4, -3.9055862163703171e-5, -6.2438459371265972e-6, -5.8305299371862156e-7, -2.9667965217045498e-8, -7.3799995790060270e-10, -7.4837251736342182e-12, -2.1877280815781529e-14, -7.7348040171571290e-18], [4.8520397477870239e-6, 3.1392442477300289e-6, 1.3028871806368788e-6, 3.4065143384578664e-7, 5.4459816120918393e-8, 5.0854808335054930e-9, 2.5876870575260152e-10, 6.4369528785710166e-12, 6.5274239974643727e-14, 1.9081711944893192e-16, 6.7464189852641031e-20], [-4.7022380105266955e-8, -3.0423233150538863e-8, -1.2626618851885451e-8, -3.3013417456199862e-9, -5.2778426247024207e-10, -4.9284719813308353e-11, -2.5077949861356124e-12, -6.2382189580636737e-14, -6.3258970475339446e-16, -1.8492586067868404e-18, -6.5381315277132972e-22], [4.7849087896032107e-10, 3.0958109607685942e-10, 1.2848610488763816e-10, 3.3593837314218002e-11, 5.3706348092834414e-12, 5.0151225880022233e-13, 2.5518867250316260e-14, 6.3479005726549181e-16, 6.4371231315723313e-18, 1.8817747656996955e-20, 6.6531017368741993e-24], [-5.0081437110520086e-12, -3.2402439569884671e-12, -1.3448063813360737e-12, -3.5161202373146981e-13, -5.6212182217428823e-14, -5.2491303967723376e-15, -2.6709670715554225e-16, -6.6441446500606293e-18, -6.7375709841033147e-20, -1.9696228603882415e-22, -6.9638036366140145e-26], [5.3388428940726216e-14, 3.4542179437103562e-14, 1.4336238409543354e-14, 3.7483881203073291e-15, 5.9926505505286906e-16, 5.5961117746417343e-17, 2.8476184276403002e-18, 7.0838905524289688e-20, 7.1839573523389950e-22, 2.1003200455308800e-24, 7.4271796023997872e-28], [-5.7651113594678054e-16, -3.7301406368658368e-16, -1.5482508403761725e-16, -4.0485434209473322e-17, -6.4735407152236071e-18, -6.0464919965197640e-19, -3.0777026493268081e-20, -7.6593508907382146e-22, -7.7719990256039178e-24, -2.2742290930053534e-26, -8.0547977678631547e-30], [6.2837943643710401e-18, 4.0668105633497274e-18, 1.6889051434939728e-18, 4.4201009938928610e-19, 7.0762349425302677e-20, 6.6204284373652616e-21, 3.3774475033678902e-22, 8.4313345895922286e-24, 8.5929301980845773e-26, 2.5313001367812426e-28, 9.0731764166756948e-32], [-6.8892267749876066e-20, -4.4665302530145413e-20, -1.8616364257388926e-20, -4.8998362694838493e-21, -7.9074386813672592e-22, -7.4791037866293347e-23, -3.8715362567943796e-24, -9.8564473035927924e-26, -1.0322392517704371e-27, -3.1650359819277533e-30, -1.2141929353136514e-33], [7.5293093203815819e-22, 4.9332270568222424e-22, 2.1002131437811793e-22, 5.7083613270069719e-23, 9.6226760555083449e-24, 9.6242064595311692e-25, 5.3403112520273882e-26, 1.4807398504663826e-27, 1.7231270700016829e-29, 6.0405402362539553e-32, 2.7889430132053298e-35], [-7.8776035410269647e-24, -5.4679826873953527e-24, -2.5864483220114749e-24, -8.0683591445928107e-25, -1.5888998506116145e-25, -1.8686431031648677e-26, -1.2185240794928948e-27, -3.9537605734475773e-29, -5.3566542799038496e-31, -2.1794899631708748e-33, -1.1739719377313201e-36], [6.2360158897814931e-26, 6.0494629638184148e-26, 4.2325028840459586e-26, 1.8162881393228305e-26, 4.5305487969253593e-27, 6.3282792145644588e-28, 4.6820385257077582e-29, 1.6700910011866199e-30, 2.4347330602761509e-32, 1.0514000049188255e-34, 5.9742750935480541e-38], [5.1509799750556282e-28, -6.5557158584241870e-28, -1.1206403064749025e-27, -6.4263902129242825e-28, -1.8302035224314127e-28, -2.7459854120503369e-29, -2.1213963575197729e-30, -7.7893105439320734e-32, -1.1600046938337378e-33, -5.0987764432735777e-36, -2.9509451903898860e-39]],
        [[4.6758102250127307e-2, 3.0252246713317084e-2, 1.2555653944703127e-2, 3.2827873216538871e-3, 5.2481796957056828e-4, 4.9007725589826353e-5, 2.4937004248436219e-6, 6.2031581709365302e-8, 6.2903433071372002e-10, 1.8388650539514033e-12, 6.5013842099345396e-16], [-5.1960664631874348e-4, -3.3618277265033390e-4, -1.3952664724604550e-4, -3.6480482070436743e-5, -5.8321208939986572e-6, -5.4460593377517300e-7, -2.7711631831179103e-8, -6.8933555013750827e-10, -6.9902413330399790e-12, -2.0434672446989252e-14, -7.2247638018422464e-18], [4.3306123764918735e-6, 2.8018834753628371e-6, 1.1628716254939103e-6, 3.0404312238529672e-7, 4.8607259173579527e-8, 4.5389665701939427e-9, 2.3095997067065506e-10, 5.7452018495221515e-12, 5.8259504286276517e-14, 1.7031084198870502e-16, 6.0214109605465832e-20], [-4.0103317546042782e-8, -2.5946635944968596e-8, -1.0768687202523471e-8, -2.8155689849169694e-9, -4.5012395072327399e-10, -4.2032766316864562e-11, -2.1387878351540376e-12, -5.3203019577793194e-14, -5.3950785953371260e-16, -1.5771510447245216e-18, -5.5760834236375750e-22], [3.8994211308892483e-10, 2.5229050080343586e-10, 1.0470866064880026e-10, 2.7377010184246238e-11, 4.3767523219601945e-12, 4.0870300170351986e-13, 2.0796371475233809e-14, 5.1731628775659147e-16, 5.2458716432042564e-18, 1.5335332337330023e-20, 5.4218712642422796e-24], [-3.8999065647192220e-12, -2.5232191497921147e-12, -1.0472170438454361e-12, -2.7380422979861856e-13, -4.3772984686802637e-14, -4.0875407047991675e-15, -2.0798974806818515e-16, -5.1738120733175994e-18, -5.2465322515590571e-20, -1.5337273526788745e-22, -5.4225637567336606e-26], [3.9726192186664967e-14, 2.5702646553411997e-14, 1.0667431211448723e-14, 2.7890977573058027e-15, 4.4589269952874904e-16, 4.1637738776757173e-17, 2.1186934001662245e-18, 5.2703370016453651e-20, 5.3444407198909856e-22, 1.5623608931387170e-24, 5.5238720668369046e-28], [-4.0992299547121317e-16, -2.6521890913549384e-16, -1.1007511712467174e-16, -2.8780426313443325e-17, -4.6011861159850564e-18, -4.2966968438614927e-19, -2.1863852399821533e-20, -5.4389111242168790e-22, -5.5156536060503357e-24, -1.6125306756488488e-26, -5.7019904593458054e-30], [4.2704519998087690e-18, 2.7630375649692606e-18, 1.1468154138291724e-18, 2.9987220526084942e-19, 4.7946633674860927e-20, 4.4780664340617617e-21, 2.2791548233949379e-22, 5.6713167341783072e-24, 5.7536734056546716e-26, 1.6831510988498629e-28, 5.9581950159697472e-32], [-4.4810699966244660e-20, -2.8998294766168460e-20, -1.2040345313382351e-20, -3.1501583049402334e-21, -5.0409398289191512e-22, -4.7133830693995035e-23, -2.4025773037868015e-24, -5.9908884263824771e-26, -6.0957782263615504e-28, -1.7911825859453051e-30, -6.3908290120453256e-34], [4.7250244346793164e-22, 3.0612178857947789e-22, 1.2740448186719340e-22, 3.3456515521317228e-23, 5.3818694732223976e-24, 5.0681168557063383e-25, 2.6082030772917564e-26, 6.5881853069588714e-28, 6.8251425951693498e-30, 2.0596453879960463e-32, 7.6915802760714972e-36], [-4.9780101351099092e-24, -3.2465803268337781e-24, -1.3694732796935101e-24, -3.6712072549953950e-25, -6.0760125354046890e-26, -5.9390587876395092e-27, -3.2055032345929109e-28, -8.6015797197207353e-30, -9.6298524527297550e-32, -3.2220517609374446e-34, -1.3998580335999485e-37], [5.1141852485478195e-26, 3.4545909455853581e-26, 1.5580538176586383e-26, 4.5852504898966614e-27, 8.4994898188790198e-28, 9.4380141898126653e-29, 5.8426885135466349e-30, 1.8102220723405582e-31, 2.3531020725595891e-33, 9.2113888904915865e-36, 4.7635459736564967e-39], [-4.5566578037828694e-28, -3.7125062011869921e-28, -2.1751430781281506e-28, -8.3120054911842080e-29, -1.9313445588594560e-29, -2.5768805089476617e-30, -1.8476374529872797e-31, -6.4417493451695923e-33, -9.2206196697911240e-35, -3.9119830465847088e-37, -2.1771073405487617e-40]],
        [[4.5752081092416438e-2, 2.9601356305081909e-2, 1.2285513521772798e-2, 3.2121567070026964e-3, 5.1352627987557720e-4, 4.7953302795441957e-5, 2.4400473622157171e-6, 6.0696944916106176e-8, 6.1550038012178330e-10, 1.7993010626550857e-12, 6.3615040660688492e-16], [-4.8678625190081893e-4, -3.1494814974263564e-4, -1.3071359678395026e-4, -3.4176231694499999e-5, -5.4637412564530007e-6, -5.1020648627783957e-7, -2.5961256440213008e-8, -6.4579441223375286e-10, -6.5487102647395286e-12, -1.9143938361234232e-14, -6.7684193742365083e-18], [3.8843908405423635e-6, 2.5131804838967061e-6, 1.0430506122546811e-6, 2.7271485347048133e-7, 4.3598820650425480e-8, 4.0712764470084639e-9, 2.0716210930812441e-10, 5.1532225694165465e-12, 5.2256509033931345e-14, 1.5276220010999766e-16, 5.4009713956203092e-20], [-3.4440068368768916e-8, -2.2282543452024496e-8, -9.2479711423289238e-9, -2.4179642535094775e-9, -3.8655903222550989e-10, -3.6097047118798249e-11, -1.8367557493742512e-12, -4.5689876466756695e-14, -4.6332045830105215e-16, -1.3544313212888481e-18, -4.7886485139864181e-22], [3.2062248645145605e-10, 2.0744106575105678e-10, 8.6094704333412655e-11, 2.2510225689018116e-11, 3.5987012834933729e-12, 3.3604825930673088e-13, 1.7099420098473445e-14, 4.2535344905285281e-16, 4.3133177540643977e-18, 1.2609183508347577e-20, 4.4580295230198822e-24], [-3.0701401514637431e-12, -1.9863645662538060e-12, -8.2440509103247499e-13, -2.1554803997366662e-13, -3.4459584080539545e-14, -3.2178506829233662e-15, -1.6373654671830630e-16, -4.0729981466329858e-18, -4.1302441016839724e-20, -1.2074002214052631e-22, -4.2688142635171643e-26], [2.9942718555849859e-14, 1.9372782217600498e-14, 8.0403271969075612e-15, 2.1022151798949924e-15, 3.3608038558537685e-16, 3.1383334491003122e-17, 1.5969043665846932e-18, 3.9723509249282776e-20, 4.0281837564651192e-22, 1.1775654141674229e-24, 4.1633359552668662e-28], [-2.9582029365012001e-16, -1.9139422749895408e-16, -7.9434793936246089e-17, -2.0768950463391662e-17, -3.3203282552987383e-18, -3.1005417455895968e-19, -1.5776776436466845e-20, -3.9245344514736062e-22, -3.9797102720607652e-24, -1.1634016611231340e-26, -4.1132996792610971e-30], [2.9506641362728704e-18, 1.9090687336587250e-18, 7.9232868933533376e-19, 2.0716295790181067e-19, 3.3119422892266153e-20, 3.0927515636384445e-21, 1.5737415936567018e-22, 3.9148377402819631e-24, 3.9700114499682664e-26, 1.1606251681146420e-28, 4.1038454410665560e-32], [-2.9649020185466671e-20, -1.9183120054121373e-20, -7.9619172490268888e-21, -2.0818396371953801e-21, -3.3285148445993991e-22, -3.1085456618320957e-23, -1.5819970124551086e-24, -3.9361146065812400e-26, -3.9926442212075563e-28, -1.1677060468432790e-30, -4.1317594667595476e-34], [2.9964363992066308e-22, 1.9389339870603763e-22, 8.0493747659917682e-23, 2.1054731777190569e-23, 3.3680435797001943e-24, 3.1476868598952985e-25, 1.6034464855981531e-26, 3.9946744606499006e-28, 4.0594654129222180e-30, 1.1905223094456777e-32, 4.2328941028170409e-36], [-3.0409627176381861e-24, -1.9691227836140470e-24, -8.1864358801032964e-25, -2.1461368387281975e-25, -3.4440523889934387e-26, -3.2327250816030548e-27, -1.6564004164042232e-28, -4.1593340670270478e-30, -4.2736471612895902e-32, -1.2740506637746439e-34, -4.6594965198608565e-38], [3.0886271022118275e-26, 2.0076622732289782e-26, 8.4141242397051619e-27, 2.2332528967290403e-27, 3.6461595653999470e-28, 3.5021055082167657e-29, 1.8490973766683376e-30, 4.8278775502396203e-32, 5.2238171293661542e-34, 1.6730393899713929e-36, 6.8349894044303200e-40], [-3.0933208245978925e-28, -2.1042160306676543e-28, -9.0609831385854521e-29, -2.5484785449249339e-29, -4.4709087994703689e-30, -4.6963801693882746e-31, -2.7583787712424688e-32, -8.0523378164499533e-34, -9.8907354136420295e-36, -3.7077761614001827e-38, -1.8003682484150346e-41]],
        [[4.4808333627668205e-2, 2.8990756649306672e-2, 1.2032095055061234e-2, 3.1458981964338657e-3, 5.0293355680937967e-4, 4.6964149802639498e-5, 2.3897154766058507e-6, 5.9444923444845974e-8, 6.0280419429980415e-10, 1.7621861210905740e-12, 6.2302826398300596e-16], [-4.5728146532374015e-4, -2.9585870770371703e-4, -1.2279086527546142e-4, -3.2104763122373981e-5, -5.1325763579894704e-6, -4.7928216697114270e-7, -2.4387708856336216e-8, -6.0665192159995988e-10, -6.1517838972370632e-12, -1.7983597835200446e-14, -6.3581761343685653e-18], [3.4999827055620242e-6, 2.2644704383980525e-6, 9.3982795598520323e-7, 2.4572637251967438e-7, 3.9284182391307797e-8, 3.6683736881749095e-9, 1.8666087672076997e-10, 4.6432479663125319e-12, 4.7085086279314535e-14, 1.3764450602100401e-16, 4.8664790062037414e-20], [-2.9764921822416771e-8, -1.9257748177156861e-8, -7.9925839610575653e-9, -2.0897321167183163e-9, -3.3408468444185904e-10, -3.1196970165345216e-11, -1.5874211018590346e-12, -3.9487598753464340e-14, -4.0042595350711021e-16, -1.1705709158519621e-18, -4.1386023692646858e-22], [2.6578625396647281e-10, 1.7196231115316022e-10, 7.1369881743562713e-11, 1.8660289935807467e-11, 2.9832135062398531e-12, 2.7857374818288419e-13, 1.4174897240789010e-14, 3.5260502333532701e-16, 3.5756087266473724e-18, 1.0452628122509043e-20, 3.6955703357895711e-24], [-2.4411504943963049e-12, -1.5794115560005869e-12, -6.5550651912453699e-13, -1.7138800580407121e-13, -2.7399735790111532e-14, -2.5585990034235986e-15, -1.3019129845271581e-16, -3.2385494661463931e-18, -3.2840671540258664e-20, -9.6003605009764436e-23, -3.3942475741303244e-26], [2.2836282833985427e-14, 1.4774955146965285e-14, 6.1320809091938777e-15, 1.6032870660705921e-15, 2.5631689988334091e-16, 2.3934981566751879e-17, 1.2179033782306121e-18, 3.0295729842239699e-20, 3.0721535917571547e-22, 8.9808708803944780e-25, 3.1752246272722306e-28], [-2.1640140471668465e-16, -1.4001057560717472e-16, -5.8108887640628194e-17, -1.5193086096154712e-17, -2.4289131497013726e-18, -2.2681297167301246e-19, -1.1541112899389328e-20, -2.8708887197007331e-22, -2.9112398156757216e-24, -8.5104727528563044e-27, -3.0089154666719604e-30], [2.0703824953641287e-18, 1.3395268534938305e-18, 5.5594687351506131e-19, 1.4535733745327648e-19, 2.3238242158083174e-20, 2.1699994316251116e-21, 1.1041803592702587e-22, 2.7466890423392566e-24, 2.7853016972008139e-26, 8.1423472054644219e-29, 2.8787820425926530e-32], [-1.9954721549694284e-20, -1.2910620138757243e-20, -5.3583390454542427e-21, -1.4009923547650181e-21, -2.2397770437563050e-22, -2.0915335115227709e-23, -1.0642660010422586e-24, -2.6474416189606001e-26, -2.6847171210800458e-28, -7.8485582848605399e-31, -2.7750650116794772e-34], [1.9345681764032413e-22, 1.2516700338067834e-22, 5.1949565616785783e-23, 1.3583183550853775e-23, 2.1716537905091123e-24, 2.0280463867446478e-25, 1.0320481054364088e-26, 2.5675916085726132e-28, 2.6041606026567185e-30, 7.6148815689564869e-33, 2.6935602440105582e-36], [-1.8843841058625074e-24, -1.2192824886393399e-24, -5.0612311290006149e-25, -1.3236364745352376e-25, -2.1168526843356751e-26, -1.9776934936619506e-27, -1.0069882055826798e-28, -2.5071512050576911e-30, -2.5455804562991075e-32, -7.4554456623313967e-35, -2.6444924266297631e-38], [1.8422212372418773e-26, 1.1926618984413930e-26, 4.9547085644762646e-27, 1.2974508002585013e-27, 2.0786837022620635e-28, 1.9470408879062119e-29, 9.9464823935909544e-31, 2.4879720810456554e-32, 2.5415951106304089e-34, 7.5130701402831323e-37, 2.7080373082769955e-40], [-1.8324111884133789e-28, -1.1943494973064908e-28, -4.9934190960396100e-29, -1.3157072954936161e-29, -2.1437251078125124e-30, -2.0059936035039052e-31, -1.0392283588307375e-32, -2.6763655379521842e-34, -2.8390287669413283e-36, -8.7022332207567922e-39, -3.3188753200058775e-42]],
        [[4.3920688192492015e-2, 2.8416454712173911e-2, 1.1793741307296861e-2, 3.0835784905327907e-3, 4.9297052895816958e-4, 4.6033798017285386e-5, 2.3423756212163328e-6, 5.8267329665557696e-8, 5.9086274617942845e-10, 1.7272775150416528e-12, 6.1068618049680406e-16], [-4.3064155285437554e-4, -2.7862282417420104e-4, -1.1563742007588391e-4, -3.0234431293323680e-5, -4.8335671146946973e-6, -4.5136055644358655e-7, -2.2966950573904487e-8, -5.7131011285344544e-10, -5.7933985329038345e-12, -1.6935924774856780e-14, -5.9877669476228210e-18], [3.1667991028603854e-6, 2.0489023963966099e-6, 8.5036029553151996e-7, 2.2233425748297243e-7, 3.5544493792977968e-8, 3.3191599736207576e-9, 1.6889154794933494e-10, 4.2012303291391951e-12, 4.2602784508157298e-14, 1.2454132915795617e-16, 4.4032107148477187e-20], [-2.5875080782311844e-8, -1.6741041442745731e-8, -6.9480698415873285e-9, -1.8166346162760081e-9, -2.9042469016401035e-10, -2.7119981298879931e-11, -1.3799683228070188e-12, -3.4327145682676210e-14, -3.4809612321333434e-16, -1.0175943746456118e-18, -3.5977474177498547e-22], [2.2198921046556517e-10, 1.4362585390607060e-10, 5.9609341952279472e-11, 1.5585392276275764e-11, 2.4916307783509770e-12, 2.3266954360738854e-13, 1.1839115828394693e-14, 2.9450172665609081e-16, 2.9864093646750973e-18, 8.7302132004780286e-21, 3.0866033442726075e-24], [-1.9589182001270428e-12, -1.2674097927437229e-12, -5.2601576718840444e-13, -1.3753149769540608e-13, -2.1987108607068294e-14, -2.0531655691274630e-15, -1.0447291300955678e-16, -2.5987965417870129e-18, -2.6353225219711054e-20, -7.7038760140508728e-23, -2.7237375456249909e-26], [1.7606359531150787e-14, 1.1391222198662401e-14, 4.7277230455498604e-15, 1.2361052118909558e-15, 1.9761567358563812e-16, 1.8453435803413831e-17, 9.3898135836665170e-19, 2.3357456391411438e-20, 2.3685744532612682e-22, 6.9240875861882331e-25, 2.4480400990654120e-28], [-1.6029746189803797e-16, -1.0371161655068904e-16, -4.3043651709132764e-17, -1.1254145369312586e-17, -1.7991959814315362e-18, -1.6800968862049689e-19, -8.5489753168137818e-21, -2.1265845058751652e-22, -2.1564736079311076e-24, -6.3040503201743845e-27, -2.2288234339060145e-30], [1.4734643722546919e-18, 9.5332372702118216e-19, 3.9565997373366653e-19, 1.0344882126648075e-19, 1.6538324993166580e-20, 1.5443559603583120e-21, 7.8582743651761573e-23, 1.9547707317688658e-24, 1.9822453607907994e-26, 5.7947279539611597e-29, 2.0487513175256244e-32], [-1.3644502396593404e-20, -8.8279224770945175e-21, -3.6638722315063536e-21, -9.5795232518000733e-22, -1.5314755921614876e-22, -1.4300994816019876e-23, -7.2769000139532356e-25, -1.8101541459091468e-26, -1.8355991661040882e-28, -5.3660478542491116e-31, -1.8971973799029555e-34], [1.2709328746726481e-22, 8.2228766080972475e-23, 3.4127645021932415e-23, 8.9230033015682215e-24, 1.4265233156133174e-24, 1.3321013036680403e-25, 6.7782938040509819e-27, 1.6861397533810760e-28, 1.7098635729469642e-30, 4.9985774409228106e-33, 1.7673335763889191e-36], [-1.1894811267507306e-24, -7.6959328752062993e-25, -3.1941017495444029e-25, -8.3514443104046949e-26, -1.3351850724303798e-26, -1.2468522735204313e-27, -6.3448162808151521e-29, -1.5784179180452488e-30, -1.6007734712884647e-32, -4.6802781514746335e-35, -1.6551741894066810e-38], [1.1180666477716190e-26, 7.2336150252447362e-27, 3.0017425255828604e-27, 7.8500640405688503e-28, 1.2550922272210674e-28, 1.1724923935004893e-29, 5.9682849396252950e-31, 1.4858060515297583e-32, 1.5076470724235652e-34, 4.4108670800661891e-37, 1.5624838211112537e-40], [-1.0953897141068907e-28, -6.9518367272601665e-29, -2.9071637377676127e-29, -7.5654930341117795e-30, -1.2170776717130538e-30, -1.1470288483071980e-31, -5.9617849260629881e-33, -1.4289981039653340e-34, -1.4972859293598887e-36, -4.4515616843011990e-39, -1.6036859996723014e-42]],
        [[4.3083796975177907e-2, 2.7874990487579003e-2, 1.1569016264827272e-2, 3.0248221307663987e-3, 4.8357717190803330e-4, 4.5156642334035792e-5, 2.2977425868600604e-6, 5.7157068910085589e-8, 5.7960409192636990e-10, 1.6943649300687788e-12, 5.9904979859966795e-16], [-4.0649161844455573e-4, -2.6299794337882392e-4, -1.0915259274874084e-4, -2.8538915549865268e-5, -4.5625056529949890e-6, -4.2604872166813827e-7, -2.1678987658396125e-8, -5.3927163058988374e-10, -5.4685107145959547e-12, -1.5986175569812585e-14, -5.6519791489584391e-18], [2.8763866300003393e-6, 1.8610070508885969e-6, 7.7237769283839267e-7, 2.0194501287986077e-7, 3.2284872957019580e-8, 3.0147751912432643e-9, 1.5340328661920089e-10, 3.8159549613906697e-12, 3.8695880534183506e-14, 1.1312022090344517e-16, 3.9994126617698652e-20], [-2.2615157295345265e-8, -1.4631888058660358e-8, -6.0727034511887289e-9, -1.5877622930294559e-9, -2.5383495826607941e-10, -2.3703216545706245e-11, -1.2061102705500499e-12, -3.0002371998160876e-14, -3.0424054118287765e-16, -8.8939072457568530e-19, -3.1444780576984126e-22], [1.8669854827255185e-10, 1.2079298071478380e-10, 5.0132966294251311e-11, 1.3107709632050880e-11, 2.0955245895577926e-12, 1.9568097894176303e-13, 9.9569962582039644e-15, 2.4768341089307898e-16, 2.5116459117558463e-18, 7.3423304095180414e-21, 2.5959115861182643e-24], [-1.5853186345637010e-12, -1.0256928349125091e-12, -4.2569546687803664e-13, -1.1130186350384001e-13, -1.7793786892109051e-14, -1.6615914007828456e-15, -8.4548122407139241e-17, -2.1031611140006537e-18, -2.1327209580693810e-20, -6.2346136739670147e-23, -2.2042737072270286e-26], [1.3710744118282440e-14, 8.8707794741842816e-15, 3.6816583691994825e-15, 9.6260230415384203e-16, 1.5389086690234946e-16, 1.4370394714976670e-17, 7.3122061831237815e-19, 1.8189342666770992e-20, 1.8444993141200688e-22, 5.3920512214692967e-25, 1.9063822330868713e-28], [-1.2011833588776319e-16, -7.7715932801014736e-17, -3.2254607985101489e-17, -8.4332539470330189e-18, -1.3482211247239090e-18, -1.2589746308189844e-19, -6.4061442070627291e-21, -1.5935485041724570e-22, -1.6159457657254462e-24, -4.7239173730912188e-27, -1.6701607247591218e-30], [1.0624622521685397e-18, 6.8740750069828770e-19, 2.8529618958287133e-19, 7.4593224765215631e-20, 1.1925190726122896e-20, 1.1135793966972038e-21, 5.6663177114268305e-23, 1.4095143509269560e-24, 1.4293250373177086e-26, 4.1783664033742691e-29, 1.4772789444975732e-32], [-9.4672276728050077e-21, -6.1252466602913487e-21, -2.5421741225391521e-21, -6.6467403776472261e-22, -1.0626119152059853e-22, -9.9227158523490514e-24, -5.0490575026637820e-25, -1.2559690379096638e-26, -1.2736217956411231e-28, -3.7231975108187061e-31, -1.3163524494002080e-34], [8.4855360929044033e-23, 5.4900975661171922e-23, 2.2785671378848115e-23, 5.9575177458748418e-24, 9.5242641824297394e-25, 8.8938023330423884e-26, 4.5255092126007206e-27, 1.1257355454460882e-28, 1.1415589447940425e-30, 3.3371410083534186e-33, 1.1798633592114584e-36], [-7.6420026811569024e-25, -4.9443401148212847e-25, -2.0520654222996247e-25, -5.3653117221539422e-26, -8.5775100112981245e-27, -8.0097255588884966e-28, -4.0756885436246335e-29, -1.0138438605947061e-30, -1.0281032284029088e-32, -3.0055014307062804e-35, -1.0626307296860442e-38], [6.9126472444329370e-27, 4.4728976798106527e-27, 1.8561756231831618e-27, 4.8546464890296369e-28, 7.7591865599472958e-29, 7.2465590353212533e-30, 3.6878291232431338e-31, 9.1726443867787784e-33, 9.3016448161156603e-35, 2.7196262227401972e-37, 9.6157100621968947e-41], [-6.5700843963407126e-29, -4.3767693437887209e-29, -1.8393841553434574e-29, -4.8124036918951457e-30, -7.7158256229136632e-31, -7.1919726780403350e-32, -3.5509333349639661e-33, -9.0989979864221180e-35, -9.3493782831472653e-37, -2.7558848445268613e-39, -9.0363732399460347e-43]],
    ],
    [
        [[1.2424435337768955e-1, 1.1804323306842437e-1, 1.0687408730286367e-1, 9.2712176668068768e-2, 7.7585065825967772e-2, 6.3037071507280032e-2, 4.9926826933190788e-2, 3.8511833655355551e-2, 2.8662135909336864e-2, 2.0065486172137899e-2, 1.2362218097995405e-2, 5.2154775704317056e-3], [-3.6336243397723887e-3, -7.5375902708986925e-3, -1.4028970347317287e-2, -2.1088899018514213e-2, -2.6826363468092869e-2, -3.0059897257360170e-2, -3.0447330127203429e-2, -2.8269583228811929e-2, -2.4103681041475641e-2, -1.8562894684852498e-2, -1.2163305730464064e-2, -5.3019952232386402e-3], [5.9189549171325029e-5, 2.4898912711939436e-4, 7.3408471798202297e-4, 1.6032019421709821e-3, 2.7975130860867710e-3, 4.0828169563559246e-3, 5.1362033983101172e-3, 5.6727004797126988e-3, 5.5330641115763498e-3, 4.7047781664173171e-3, 3.2949183171851298e-3, 1.4892750290109805e-3], [-1.0103565716563447e-6, -7.4335613670389811e-6, -3.2048059234364267e-5, -9.6236262990645785e-5, -2.2017517175082955e-4, -4.0432050596497741e-4, -6.1644623380247199e-4, -7.9680535781418140e-4, -8.8014401579853597e-4, -8.2154207040754337e-4, -6.1311678309941305e-4, -2.8698516589925813e-4], [1.7419938689902218e-8, 2.0487341826902935e-7, 1.2374937009792486e-6, 4.9215815702267627e-6, 1.4305931846773582e-5, 3.2229666422837603e-5, 5.8399361996853660e-5, 8.7066804861723503e-5, 1.0779155953616138e-4, 1.0968273021829134e-4, 8.6853794701777037e-5, 4.2008191986467955e-5], [-2.9847182453020680e-10, -5.3113720314528301e-9, -4.3540336812003397e-8, -2.2304356440348680e-7, -8.0443030563624690e-7, -2.1798003047928398e-6, -4.6193305460699895e-6, -7.8440724009654360e-6, -1.0781638609121744e-5, -1.1878927557050204e-5, -9.9368521332512139e-6, -4.9545309156772068e-6], [5.0510002951794494e-12, 1.3105435929382920e-10, 1.4214742665456180e-9, 9.1758588102280873e-9, 4.0289755603602516e-8, 1.2920413409848854e-7, 3.1592059053432995e-7, 6.0437424355200935e-7, 9.1445298678516976e-7, 1.0841031030259022e-6, 9.5398090711552427e-7, 4.8922862700469644e-7], [-8.4311376652107440e-14, -3.1017323610541015e-12, -4.3591232753169657e-11, -3.4823132904245751e-10, -1.8323428745454039e-9, -6.8596042714701605e-9, -1.9128878013529655e-8, -4.0832949628895121e-8, -6.7493651113689700e-8, -8.5605245382044461e-8, -7.8935484021771887e-8, -4.1546275651885671e-8], [1.3883771563657393e-15, 7.0808637675827625e-14, 1.2666967233990856e-12, 1.2331855237573354e-11, 7.6716267130360039e-11, 3.3132426233349545e-10, 1.0430707514624006e-9, 2.4633583954566117e-9, 4.4176805471288657e-9, 5.9633763765422690e-9, 5.7412382593036579e-9, 3.0952013453123698e-9], [-2.2575910416229902e-17, -1.5657350491859718e-15, -3.5107253078361461e-14, -4.1099085987659900e-13, -2.9873100959929021e-12, -1.4729929302445064e-11, -5.1881474006608524e-11, -1.3452598079010165e-10, -2.6013118432340680e-10, -3.7194869106629450e-10, -3.7265210157168921e-10, -2.0540571342638765e-10], [3.6280956071788837e-19, 3.3644716031675110e-17, 9.3274215262730076e-16, 1.2975750207714230e-14, 1.0904677729657528e-13, 6.0821600681319051e-13, 2.3774248719926187e-12, 6.7219022675502260e-12, 1.3936411908246525e-11, 2.1015775038299708e-11, 2.1845214575576288e-11, 1.2290108461267375e-11], [-5.7679431983167579e-21, -7.0438709891732752e-19, -2.3850735361810933e-17, -3.9011065523427715e-16, -3.7549288342438227e-15, -2.3492966371128805e-14, -1.0116852170999012e-13, -3.0996179413417594e-13, -6.8550057605887080e-13, -1.0858669408712177e-12, -1.1677991870625597e-12, -6.6954705064870274e-13], [9.0777733555171497e-23, 1.4398583337891455e-20, 5.8887215318155316e-19, 1.1215661219750345e-17, 1.2258790205361910e-16, 8.5382577143085293e-16, 4.0238186894608860e-15, 1.3283097970028572e-14, 3.1188641264502438e-14, 5.1707336228183494e-14, 5.7386765483549408e-14, 3.3482256284377678e-14], [-1.4150777653151951e-24, -2.8776432917829769e-22, -1.4068515617594814e-20, -3.0920990647186270e-19, -3.8071510106867520e-18, -2.9309266974060979e-17, -1.5021305464754779e-16, -5.3140304291621391e-16, -1.3188055987930212e-15, -2.2804124723570706e-15, -2.6054333839016442e-15, -1.5448181633690924e-15]],
        [[1.1741529782435742e-1, 1.0471212376689814e-1, 8.3671471091604238e-2, 6.0465034942129577e-2, 4.0058589846138803e-2, 2.4753089234588230e-2, 1.4543807465900808e-2, 8.2775645085824029e-3, 4.6230793549062653e-3, 2.5275299507980275e-3, 1.2922719268633668e-3, 4.8869775676526292e-4], [-3.2042813723236285e-3, -5.8538555816877145e-3, -9.4139105491628957e-3, -1.1818959002371428e-2, -1.2074850844540014e-2, -1.0511286619291412e-2, -8.0968071203492315e-3, -5.6891830095813081e-3, -3.7251000764026494e-3, -2.2826890357568750e-3, -1.2577867880688862e-3, -4.9508687895568953e-4], [4.8559933596567953e-5, 1.7643142209123910e-4, 4.4461136258748362e-4, 8.0493995507162812e-4, 1.1301101958428421e-3, 1.2945779066538467e-3, 1.2587977805742281e-3, 1.0726565996067610e-3, 8.1939477678738087e-4, 5.6417380189004396e-4, 3.3672699009436832e-4, 1.3851921887288657e-4], [-7.7352758520364398e-7, -4.8600196776472329e-6, -1.7706371414280355e-5, -4.3871022642133120e-5, -8.0934152715328041e-5, -1.1763093028225695e-4, -1.4046615899732601e-4, -1.4238024416176932e-4, -1.2530062454513486e-4, -9.6211520378560089e-5, -6.1955047377500653e-5, -2.6589991402312402e-5], [1.2494612180478153e-8, 1.2419611699044613e-7, 6.2848931903809450e-7, 2.0563687603185621e-6, 4.8315774925222778e-6, 8.6794178598528605e-6, 1.2461054251977377e-5, 1.4778982056755000e-5, 1.4801813421008753e-5, 1.2567631018633149e-5, 8.6846643983503441e-6, 3.8778765128180106e-6], [-2.0121790997635880e-10, -2.9963060115540590e-9, -2.0444563928477391e-8, -8.6011466551063827e-8, -2.5144501782716516e-7, -5.4712875987019478e-7, -9.2844793353138163e-7, -1.2705638823877708e-6, -1.4324598489076739e-6, -1.3340711360628209e-6, -9.8396954647315511e-7, -4.5577557809003152e-7], [3.2075236930548002e-12, 6.9006715724465708e-11, 6.1990558173112415e-10, 3.2837119045973922e-9, 1.1724064410565930e-8, 3.0398200360186147e-8, 6.0109915142433227e-8, 9.3784479401442998e-8, 1.1787475687546918e-7, 1.1952684639638074e-7, 9.3618200357956298e-8, 4.4857515243235812e-8], [-5.0515285015188577e-14, -1.5283012189890007e-12, -1.7721847549297290e-11, -1.1617381966058969e-10, -4.9882103220296180e-10, -1.5200180877282395e-9, -3.4601924406642628e-9, -6.0911298107284870e-9, -8.4614892293998570e-9, -9.2795746278035601e-9, -7.6820053918355243e-9, -3.7976261286611635e-9], [7.8570325753681382e-16, 3.2719640162961718e-14, 4.8160509654415770e-13, 3.8501182055335384e-12, 1.9620188661426385e-11, 6.9434946368804196e-11, 1.8004599868856063e-10, 3.5431742973345852e-10, 5.3982188744570217e-10, 6.3639920517828561e-10, 5.5444413587243224e-10, 2.8209944765476677e-10], [-1.2079307100613194e-17, -6.7982557658360454e-16, -1.2518048967625658e-14, -1.2049104944479093e-13, -7.2039444286901023e-13, -2.9300839883411007e-12, -8.5737190140010762e-12, -1.8707640599078188e-11, -3.1043430846331772e-11, -3.9124650358685631e-11, -3.5731360082788252e-11, -1.8669382553040911e-11], [1.8366051320817795e-19, 1.3750097855600044e-17, 3.1268383615929505e-16, 3.5829638858328624e-15, 2.4876996275404616e-14, 1.1521226918195994e-13, 3.7724751917679683e-13, 9.0594401288115849e-13, 1.6270948243749766e-12, 2.1812876386272252e-12, 2.0807392823701661e-12, 1.1141477354406179e-12], [-2.7646198871003940e-21, -2.7139136379066954e-19, -7.5340917282346674e-18, -1.0173454612779689e-16, -8.1275988150989691e-16, -4.2501787068867171e-15, -1.5455266203474503e-14, -4.0575044321199915e-14, -7.8423090288904700e-14, -1.1131914822403713e-13, -1.1054687616173683e-13, -6.0547794259718604e-14], [4.1218272823999818e-23, 5.2376107454927545e-21, 1.7564505540349192e-19, 2.7692186853429464e-18, 2.5243496328960000e-17, 1.4791703300816880e-16, 5.9323040247981590e-16, 1.6921900887749012e-15, 3.5013236604021760e-15, 5.2403171740041467e-15, 5.4012043964945214e-15, 3.0207726484689769e-15], [-6.0911931422325312e-25, -9.8966170747217735e-23, -3.9701450310245779e-21, -7.2453942979972688e-20, -7.4773004963837344e-19, -4.8743734791760693e-18, -2.1420431797090326e-17, -6.6005431225339045e-17, -1.4548065666985615e-16, -2.2866285056090451e-16, -2.4391238820606609e-16, -1.3906619461471017e-16]],
        [[1.1136803361910861e-1, 9.4252355386456280e-2, 6.7830746656047375e-2, 4.1922867320769722e-2, 2.2600735447436052e-2, 1.0862634424742184e-2, 4.7884805732755629e-3, 2.0023704259266741e-3, 8.2254663104763931e-4, 3.4047773758692180e-4, 1.3985645497003112e-4, 4.6338352458281522e-5], [-2.8498135666397167e-3, -4.6459380578819677e-3, -6.5625268779961813e-3, -7.0334602427500305e-3, -5.9067739192541596e-3, -4.0712905379829882e-3, -2.4075041593211803e-3, -1.2749845799892581e-3, -6.2962889047184182e-4, -2.9854323724931042e-4, -1.3431238742454334e-4, -4.6750057235995657e-5], [4.0356628839713737e-5, 1.2831274094041100e-4, 2.8119925172560657e-4, 4.3048772992691511e-4, 4.9584220074382694e-4, 4.5265639664852701e-4, 3.4247292422638496e-4, 2.2401677903048157e-4, 1.3173442763475684e-4, 7.1578983783739566e-5, 3.5442652565914548e-5, 1.3019239286605053e-5], [-6.0206052668594645e-7, -3.2749832707868793e-6, -1.0255292951790206e-5, -2.1347588839645153e-5, -3.2295287225017604e-5, -3.7610036363858465e-5, -3.5326396149336557e-5, -2.7907150536320009e-5, -1.9242058776537125e-5, -1.1865989181119375e-5, -6.4325122087008717e-6, -2.4878112190012781e-6], [9.1386365022452409e-9, 7.7893095041939041e-8, 3.3568501536277780e-7, 9.1870173976048678e-7, 1.7704885849630808e-6, 2.5611744346644290e-6, 2.9201318979875479e-6, 2.7353993973128685e-6, 2.1802330119475490e-6, 1.5102592201747677e-6, 8.9032046810906801e-7, 3.6125918447544088e-7], [-1.3872579723160502e-10, -1.7546646298060096e-9, -1.0123676269733851e-8, -3.5514198437429522e-8, -8.5228377740437708e-8, -1.5007670616112876e-7, -2.0404098888803130e-7, -2.2322367897062336e-7, -2.0312660183477408e-7, -1.5655216865692686e-7, -9.9700594880323699e-8, -4.2287606999058714e-8], [2.0886015584167642e-12, 3.7833924289606351e-11, 2.8577877288905998e-10, 1.2596197753002810e-9, 3.6970808855660912e-9, 7.7959860674521830e-9, 1.2454896200242352e-8, 1.5709844510497483e-8, 1.6144189032441418e-8, 1.3724570908026394e-8, 9.3843338198302006e-9, 4.1461312250978948e-9], [-3.1119793102553871e-14, -7.8627842066809165e-13, -7.6322316170936371e-12, -4.1578914833717070e-11, -1.4704279450146101e-10, -3.6626124902449638e-10, -6.7905683306408176e-10, -9.7657813868261884e-10, -1.1225360532104736e-9, -1.0444701791343587e-9, -7.6245428157842998e-10, -3.4975817869373369e-10], [4.5834264353144145e-16, 1.5827562992873183e-14, 1.9433260058351439e-13, 1.2903775544299491e-12, 5.4287316160928480e-12, 1.5785683968288943e-11, 3.3598314163345799e-11, 5.4554995034777754e-11, 6.9545138570559871e-11, 7.0328618065217195e-11, 5.4528962396714988e-11, 2.5894067941613353e-11], [-6.6799637925779561e-18, -3.0974181997376955e-16, -4.7447923803982349e-15, -3.7936898419464949e-14, -1.8776562132453073e-13, -6.3082323419812386e-13, -1.5266618727976266e-12, -2.7745397126484088e-12, -3.8925412598136410e-12, -4.2512349011258007e-12, -3.4845868672425843e-12, -1.7082735600880177e-12], [9.6319579605443699e-20, 5.9099566533144317e-18, 1.1158502574312840e-16, 1.0627899337877358e-15, 6.1273984325246723e-15, 2.3566297217901587e-14, 6.4296380116838448e-14, 1.2976632002841687e-13, 1.9897833208481436e-13, 2.3334810666858980e-13, 2.0133756726289831e-13, 1.0164350699180330e-13], [-1.3764333737659485e-21, -1.1019694329809229e-19, -2.5365976273232226e-18, -2.8502653708580717e-17, -1.8972215274416544e-16, -8.2840994918597057e-16, -2.5283374428291798e-15, -5.6266675774168617e-15, -9.3704599001542764e-15, -1.1738083251093262e-14, -1.0619553210768571e-14, -5.5083059222472968e-15], [1.9480714894250322e-23, 2.0117393746562154e-21, 5.5898845444950985e-20, 7.3452008805178385e-19, 5.5990847126537098e-18, 2.7546430294993948e-17, 9.3385519704186870e-17, 2.2767620397385003e-16, 4.0944194445072952e-16, 5.4523242784030536e-16, 5.1537959380751741e-16, 2.7408684266627494e-16], [-2.7370286976584092e-25, -3.6002851956714440e-23, -1.1964792372698301e-21, -1.8234848694378618e-20, -1.5797755817670152e-19, -8.6950401083389312e-19, -3.2524911570408621e-18, -8.6339985426309858e-18, -1.6675681865535852e-17, -2.3499004784497978e-17, -2.3129116793961922e-17, -1.2586579773452339e-17]],
        [[1.0597000714628280e-1, 8.5875910605978455e-2, 5.6621225300587353e-2, 3.0635143544297377e-2, 1.3797446023761017e-2, 5.2865679380625155e-3, 1.7781754159285759e-3, 5.4795507910469902e-4, 1.6315767524250587e-4, 4.9608297152254421e-5, 1.5785415032211910e-5, 4.4563849557331888e-6], [-2.5535682595435499e-3, -3.7578283615111877e-3, -4.7271630571196436e-3, -4.4093386100258386e-3, -3.1126127573701593e-3, -1.7346613134810322e-3, -7.9877726254397378e-4, -3.1955621229680590e-4, -1.1746739916825822e-4, -4.1944298739884618e-5, -1.4908060738646457e-5, -4.4734490763463881e-6], [3.3925731418309948e-5, 9.5474177873584974e-5, 1.8471503256298110e-4, 2.4348357693676740e-4, 2.3451047688909950e-4, 1.7355354664313394e-4, 1.0329528430675700e-4, 5.1886004337831728e-5, 2.3184663372036810e-5, 9.6948143216967227e-6, 3.8647793184185649e-6, 1.2388368500491766e-6], [-4.7558398230739635e-7, -2.2666779542955538e-6, -6.1932383508684903e-6, -1.1013669409638262e-5, -1.3895785657542473e-5, -1.3153873672831534e-5, -9.7993573951150208e-6, -6.0250006744325007e-6, -3.2121245782930557e-6, -1.5536882724470650e-6, -6.8980012007709965e-7, -2.3544510470218501e-7], [6.8025160137043272e-9, 5.0353994487042801e-8, 1.8754740734878469e-7, 4.3608647302318089e-7, 6.9974698126222116e-7, 8.2499429802665140e-7, 7.5150300633707522e-7, 5.5438748597251192e-7, 3.4695654481239396e-7, 1.9174183387913904e-7, 9.4016951680504905e-8, 3.4015010558381369e-8], [-9.7596517191624767e-11, -1.0624865418443150e-9, -5.2583892038858814e-9, -1.5607421995585242e-8, -3.1160677301634404e-8, -4.4849491259156068e-8, -4.9052914214977667e-8, -4.2719889692728022e-8, -3.0951403725966585e-8, -1.9325357249323009e-8, -1.0380874637123839e-8, -3.9626738152420199e-9], [1.3911210874770268e-12, 2.1510231823383450e-11, 1.3853429366194543e-10, 5.1502232303208465e-10, 1.2574427334379655e-9, 2.1741934658016782e-9, 2.8129529787522254e-9, 2.8530235652643437e-9, 2.3644402862990312e-9, 1.6513560094706678e-9, 9.6456330495975029e-10, 3.8679432699145205e-10], [-1.9660746327571456e-14, -4.2060339620936809e-13, -3.4639062080787746e-12, -1.5880581672410960e-11, -4.6740281971143016e-11, -9.5792177466110941e-11, -1.4477027226438856e-10, -1.6901544340264170e-10, -1.5854687491047459e-10, -1.2276153937356661e-10, -7.7445720836916315e-11, -3.2493417519269286e-11], [2.7479539943134029e-16, 7.9803495390825194e-15, 8.2797824530885519e-14, 4.6196187290949248e-13, 1.6191259493751235e-12, 3.8881219292045006e-12, 6.7894477530891302e-12, 9.0311920474973155e-12, 9.5004147512867194e-12, 8.0903653397055933e-12, 5.4787992483734379e-12, 2.3962734581628581e-12], [-3.8069247424906736e-18, -1.4743743987278898e-16, -1.9022664020674868e-15, -1.2768694635527286e-14, -5.2726770341030431e-14, -1.4686505666004766e-13, -2.9347937969241946e-13, -4.4076664408062222e-13, -5.1565177706682025e-13, -4.7948498741619839e-13, -3.4662476650424436e-13, -1.5751070180500246e-13], [5.2145232188325674e-20, 2.6595396203186660e-18, 4.2184536675840921e-17, 3.3719642599528521e-16, 1.6250060292922558e-15, 5.2030194753399900e-15, 1.1796122196937961e-14, 1.9840328672038952e-14, 2.5620342944409928e-14, 2.5844209394547897e-14, 1.9843623133406063e-14, 9.3400114175202602e-15], [-7.0980136480893048e-22, -4.6942637352347966e-20, -9.0597698727868320e-19, -8.5450490918688342e-18, -4.7649635567323116e-17, -1.7395596485429853e-16, -4.4398121081242905e-16, -8.3012059221431966e-16, -1.1751732952634729e-15, -1.2783862288474857e-15, -1.0377541893389191e-15, -5.0453459138946648e-16], [9.5366034372973421e-24, 8.1219078350842093e-22, 1.8894886955788631e-20, 2.0853533222509000e-19, 1.3350991811401907e-18, 5.5163202761291525e-18, 1.5737199374955377e-17, 3.2489037847462532e-17, 5.0108751535697516e-17, 5.8465542971895061e-17, 4.9966886425784127e-17, 2.5029289362120473e-17], [-1.2821978929200154e-25, -1.3791401868933958e-23, -3.8339024798682060e-22, -4.9127761963775823e-21, -3.5849100767199745e-20, -1.6647118044506313e-19, -5.2729755929469390e-19, -1.1943274074710166e-18, -1.9950396813031048e-18, -2.4838961920896333e-18, -2.2260699365921204e-18, -1.1461322009467740e-18]],
        [[1.0111741947523169e-1, 7.9046620696989897e-2, 4.8440667546486989e-2, 2.3416259035242441e-2, 9.0289714413054754e-3, 2.8286327251811001e-3, 7.4144378213485540e-4, 1.7008689412635457e-4, 3.6435100527986721e-5, 7.9167518646981692e-6, 1.8749662815500392e-6, 4.3594694853265129e-7], [-2.3032775779921516e-3, -3.0905899076685170e-3, -3.5026687762358592e-3, -2.8915155889295676e-3, -1.7517544488892510e-3, -8.0665315413580068e-4, -2.9450662858591434e-4, -8.9759695554159650e-5, -2.4392460670131418e-5, -6.4002640965957308e-6, -1.7337996608713650e-6, -4.3491939517184996e-7], [2.8812755906714978e-5, 7.2487829154090136e-5, 1.2543665545467276e-4, 1.4470739637199649e-4, 1.1867846827464353e-4, 7.2494033854025216e-5, 3.4431708011168864e-5, 1.3358321575842888e-5, 4.5008809649630473e-6, 1.4154961404233385e-6, 4.3969793759924701e-7, 1.1962480971631517e-7], [-3.8071593167567672e-7, -1.6065038395549903e-6, -3.8814728887302743e-6, -5.9876651267381440e-6, -6.4042145655585210e-6, -5.0046514303604814e-6, -2.9914050288196125e-6, -1.4364088927443372e-6, -5.8703730629240603e-7, -2.1788561266471565e-7, -7.6886192536279655e-8, -2.2586714960911699e-8], [5.1445101064758470e-9, 3.3443500229518050e-8, 1.0908746687624034e-7, 2.1864550188909956e-7, 2.9648623170642995e-7, 2.8872985204742653e-7, 2.1206531100907949e-7, 1.2338058294008497e-7, 6.0056806931405912e-8, 2.5925663079043326e-8, 1.0284611523097361e-8, 3.2431956435196618e-9], [-6.9935579380941736e-11, -6.6296579621542025e-10, -2.8513482075767035e-9, -7.2593974932302314e-9, -1.2221461547549548e-8, -1.4544668876714189e-8, -1.2888671446073104e-8, -8.9330001127525097e-9, -5.1005978335408141e-9, -2.5279784415924279e-9, -1.1163421808107062e-9, -3.7568046935959962e-10], [9.4567753720078621e-13, 1.2636559266935269e-11, 7.0281160324238447e-11, 2.2325062363900829e-10, 4.5898511558535599e-10, 6.5719100629472025e-10, 6.9225147750881870e-10, 5.6357639270204145e-10, 3.7259511200272200e-10, 2.0961699394193647e-10, 1.0212535945427865e-10, 3.6476782354172478e-11], [-1.2711420529705528e-14, -2.3306946716475836e-13, -1.6489014056939524e-12, -6.4397139626753507e-12, -1.5948716466203649e-11, -2.7119458968543657e-11, -3.3533773827018193e-11, -3.1684791940129761e-11, -2.3982249302616874e-11, -1.5161336913971543e-11, -8.0840375408519599e-12, -3.0493127298946602e-12], [1.6883557143656116e-16, 4.1779856560883075e-15, 3.7074377869719558e-14, 1.7580548129566616e-13, 5.1842048321256149e-13, 1.0352661629247622e-12, 1.4865589492249322e-12, 1.6131579335509913e-12, 1.3840301299218470e-12, 9.7442248671275206e-13, 5.6450677782718799e-13, 2.2385271537826923e-13], [-2.2316488592280988e-18, -7.3032404972590803e-17, -8.0295039788126394e-16, -4.5731080406279139e-15, -1.5893949898165323e-14, -3.6911907451049616e-14, -6.0965443433413530e-14, -7.5278133413824939e-14, -7.2561810853431634e-14, -5.6436256273299617e-14, -3.5291045442808244e-14, -1.4651795166238968e-14], [2.9005415547319335e-20, 1.2480399106948740e-18, 1.6817962691407635e-17, 1.1393711292076699e-16, 4.6251535154879150e-16, 1.2383320789586495e-15, 2.3325840613772473e-15, 3.2500475797695872e-15, 3.4915866040949314e-15, 2.9781932719516638e-15, 1.9983232481154758e-15, 8.6537764696940115e-16], [-3.7946719065442357e-22, -2.0894114895880102e-20, -3.4173751366346961e-19, -2.7301486615069415e-18, -1.2839440925146763e-17, -3.9319843088230244e-17, -8.3818980713021151e-17, -1.3079063766373396e-16, -1.5546982629757897e-16, -1.4446975292305359e-16, -1.0345569667541230e-16, -4.6573411548894230e-17], [4.7851876525817757e-24, 3.4324152237123151e-22, 6.7542116278175697e-21, 6.3129172058335934e-20, 3.4139615546767985e-19, 1.1872862056432842e-18, 2.8441525097349606e-18, 4.9358842998164359e-18, 6.4488788707381301e-18, 6.4891333609346792e-18, 4.9350862621470383e-18, 2.3024259709380222e-18], [-6.2818994208615980e-26, -5.5398014575883901e-24, -1.3007034940883089e-22, -1.4118752100054091e-21, -8.7189975254970809e-21, -3.4202270883129347e-20, -9.1459031177211090e-20, -1.7537736537685093e-19, -2.5026987734735050e-19, -2.7114074975680593e-19, -2.1798098285235667e-19, -1.0508928878928865e-19]],
        [[9.6727821536194808e-2, 7.3390114541374337e-2, 4.2309747725289536e-2, 1.8599091647395420e-2, 6.2782688531512871e-3, 1.6488255138122594e-3, 3.4493076039947262e-4, 5.9884202333736197e-5, 9.2352462860394934e-6, 1.4024592785074277e-6, 2.3697599316601412e-7, 4.3545231801384877e-8], [-2.0897494382722069e-3, -2.5796134882718405e-3, -2.6596222686710400e-3, -1.9711995235128230e-3, -1.0444098761342886e-3, -4.0598396379415192e-4, -1.1995097989232810e-4, -2.8245555668002269e-5, -5.6761214546017010e-6, -1.0729689794003785e-6, -2.1333804660410839e-7, -4.3107965306640837e-8], [2.4695568620440725e-5, 5.6030708522743061e-5, 8.7708606010630902e-5, 8.9853508614695130e-5, 6.3816888620323757e-5, 3.2760862635195006e-5, 1.2625033609756705e-5, 3.8235324440340017e-6, 9.6989860332347942e-7, 2.2508315384743838e-7, 5.2641641238628248e-8, 1.1757547242044592e-8], [-3.0847120615331816e-7, -1.1629793585916130e-6, -2.5142297573539831e-6, -3.4112705005294737e-6, -3.1411612379548336e-6, -2.0588989238000015e-6, -1.0012031271587287e-6, -3.7843977564377973e-7, -1.1816725446717203e-7, -3.3031294144664847e-8, -8.9752933172060314e-9, -2.2022705870212688e-9], [3.9467985660821924e-9, 2.2757251421611541e-8, 6.5782609710972353e-8, 1.1517065319449301e-7, 1.3387653385030865e-7, 1.0921235549073373e-7, 6.5428895722147075e-8, 3.0189536324277050e-8, 1.1374102664986933e-8, 3.7650888172470197e-9, 1.1733540510182626e-9, 3.1387936161728233e-10], [-5.0966814497520384e-11, -4.2501671581526898e-10, -1.6072731996600010e-9, -3.5550536399635608e-9, -5.1138685942035222e-9, -5.0951644804244132e-9, -3.6932504527563550e-9, -2.0443991919029542e-9, -9.1428773905873731e-10, -3.5317580910252948e-10, -1.2474471763153804e-10, -3.6110270457895932e-11], [6.5474373566018273e-13, 7.6466424960501722e-12, 3.7155344246825648e-11, 1.0208282783575354e-10, 1.7889126714176369e-10, 2.1444804023341005e-10, 1.8534364059215326e-10, 1.2133849776825208e-10, 6.3530417285319925e-11, 2.8274669249815543e-11, 1.1199136044501158e-11, 3.4840488531833859e-12], [-8.3992324245436936e-15, -1.3335074860257942e-13, -8.1973696346819142e-13, -2.7590837605645686e-12, -5.8145757951641333e-12, -8.2823813882023160e-12, -8.4311810391124845e-12, -6.4491199214156542e-12, -3.9064382529560302e-12, -1.9807896206533710e-12, -8.7146715967970251e-13, -2.8955898161913375e-13], [1.0589555645318644e-16, 2.2634550721307245e-15, 1.7372227539477029e-14, 7.0789664379413926e-14, 1.7743483479352965e-13, 2.9712013152669547e-13, 3.5248969753123683e-13, 3.1171910864594275e-13, 2.1617357380483782e-13, 1.2364714310859585e-13, 5.9913280922206898e-14, 2.1142466126580174e-14], [-1.3479016069434257e-18, -3.7515533702842201e-17, -3.5531864457781324e-16, -1.7350586621356923e-15, -5.1228576022272008e-15, -9.9905189387026803e-15, -1.3684737404878572e-14, -1.3861129909942028e-14, -1.0903230962765070e-14, -6.9726073922549275e-15, -3.6926157572355918e-15, -1.3769365674979188e-15], [1.6389918458132072e-20, 6.0853342329433267e-19, 7.0411194411866630e-18, 4.0826326555793774e-17, 1.4077873458551457e-16, 3.1707511271297313e-16, 4.9730699961399490e-16, 5.7212177287557995e-16, 5.0620260908194226e-16, 3.5903371717085768e-16, 2.0638138313130653e-16, 8.0949278229082580e-17], [-2.1223217914879436e-22, -9.6816760088119480e-21, -1.3557062905615786e-19, -9.2583715480463873e-19, -3.6997556073524419e-18, -9.5513494918153264e-18, -1.7024046913024737e-17, -2.2076129821413131e-17, -2.1803887314942583e-17, -1.7027412494687263e-17, -1.0557419750869480e-17, -4.3377917759063891e-18], [2.4774630886958453e-24, 1.5129124514259418e-22, 2.5428272916491077e-21, 2.0299301750398923e-20, 9.3345056804563316e-20, 2.7431501463083624e-19, 5.5180337982548868e-19, 8.0096799884291398e-19, 8.7695696088408320e-19, 7.4904056937554045e-19, 4.9809424747483377e-19, 2.1358233609043006e-19], [-2.8155882561129564e-26, -2.3241009500214697e-24, -4.6536134548617915e-23, -4.3125217229737877e-22, -2.2669324613894098e-21, -7.5342266874825958e-21, -1.6993231776940155e-20, -2.7429072715609089e-20, -3.3072025890981212e-20, -3.0701827336221187e-20, -2.1778779338550209e-20, -9.7119369566930193e-21]],
        [[9.2734875286607100e-2, 6.8638920829057927e-2, 3.7607828173572797e-2, 1.5264918006560254e-2, 4.6020113533997089e-3, 1.0375147581725252e-3, 1.7763669392682575e-4, 2.3849446231907820e-5, 2.6724906290063535e-6, 2.7957529652409937e-7, 3.2301384223695811e-8, 4.4634993923003744e-9], [-1.9059902714330780e-3, -2.1815878555006446e-3, -2.0629064814433788e-3, -1.3894388257529070e-3, -6.5472810613775362e-4, -2.1927178843741703e-4, -5.3577464955527231e-5, -9.9294275536337458e-6, -1.4869721673977522e-6, -1.9991025789160339e-7, -2.8098164574526933e-8, -4.3753668531294996e-9], [2.1341731282311172e-5, 4.4008294663150731e-5, 6.2930225208920503e-5, 5.7997408666892951e-5, 3.6228027524265229e-5, 1.5904756185552280e-5, 5.0625468431346638e-6, 1.2144046376473417e-6, 2.3303631680511376e-7, 3.9381118619667230e-8, 6.6998375704219764e-9, 1.1808421342292261e-9], [-2.5269693827112522e-7, -8.5803151812024790e-7, -1.6772292112224189e-6, -2.0265360847964216e-6, -1.6297479261870593e-6, -9.1013983000561507e-7, -3.6562749383813903e-7, -1.1006078680460723e-7, -2.6317375220988947e-8, -5.4639450167150328e-9, -1.1071933795414364e-9, -2.1899351551465330e-10], [3.0673551488006190e-9, 1.5827227196950811e-8, 4.0976012050893957e-8, 6.3425353671081582e-8, 6.4058162972979282e-8, 4.4398239700289323e-8, 2.1983983908627401e-8, 8.1182870325589941e-9, 2.3677344025128898e-9, 5.9236839710919436e-10, 1.4073462299038295e-10, 3.0928257613095402e-11], [-3.7732917723689329e-11, -2.7921695183653117e-10, -9.3828825854984983e-10, -1.8242866809966398e-9, -2.2707635682289496e-9, -1.9184873409550662e-9, -1.1504432788991201e-9, -5.1217343306179741e-10, -1.7909898823468281e-10, -5.3119794338272584e-11, -1.4588726558793596e-11, -3.5285248857693393e-12], [4.6051741631408316e-13, 4.7530436943992868e-12, 2.0391678416462710e-11, 4.9009887980032703e-11, 7.4078433194523962e-11, 7.5208482524353403e-11, 5.3850104595688220e-11, 2.8493624431222218e-11, 1.1776434192641905e-11, 4.0831947858409334e-12, 1.2802106544910433e-12, 3.3785100227036396e-13], [-5.6767844557003339e-15, -7.8552192231160100e-14, -4.2395582922620048e-13, -1.2433288590076648e-12, -2.2544362232913064e-12, -2.7179955043127903e-12, -2.2963217533986796e-12, -1.4268275160845134e-12, -6.8848683272678676e-13, -2.7567982835389974e-13, -9.7587338868952153e-14, -2.7882615924869339e-14], [6.7208949264022481e-17, 1.2650740145888053e-15, 8.4858203491569109e-15, 3.0026623617048878e-14, 6.4633393258250631e-14, 9.1596693385869597e-14, 9.0383563872679896e-14, 6.5262722484641855e-14, 3.6373094781754220e-14, 1.6639129404811445e-14, 6.5847408231550842e-15, 2.0228076841262663e-15], [-8.4810221552081881e-19, -1.9923126167984267e-17, -1.6419198530050590e-16, -6.9437768255818691e-16, -1.7583658882564040e-15, -2.9031733662784481e-15, -3.3159067301604286e-15, -2.7567607449682561e-15, -1.7577441050594665e-15, -9.0983947064923431e-16, -3.9898014554903479e-16, -1.3095902352714023e-16], [9.2973202096569768e-21, 3.0732732729282389e-19, 3.0838177025509434e-18, 1.5449681189058340e-17, 4.5651425723643536e-17, 8.7116247086252959e-17, 1.1424901799160698e-16, 1.0845905521714228e-16, 7.8438544295971240e-17, 4.5543660870748059e-17, 2.1954987873220963e-17, 7.6569073681265354e-18], [-1.1512108438083151e-22, -4.6535299034478759e-21, -5.6349063314700485e-20, -3.3192536007144286e-19, -1.1361458213177751e-18, -2.4879134795007531e-18, -3.7191596017393634e-18, -4.0013089758854210e-18, -3.2567115264778936e-18, -2.1044782686526614e-18, -1.1072294473313629e-18, -4.0822884022798454e-19], [1.8606418718924856e-24, 6.9371096407927765e-23, 1.0041431805753522e-21, 6.9066284141565767e-21, 2.7203695254177488e-20, 6.7909074385432728e-20, 1.1494567625604427e-19, 1.3918568984403383e-19, 1.2658342200913613e-19, 9.0382042997848762e-20, 5.1560610268203999e-20, 2.0005640433983011e-20], [5.6976042351662736e-27, -1.0139560254649820e-24, -1.7501460755943719e-23, -1.3950039990693733e-22, -6.2825487493001072e-22, -1.7767911521232996e-21, -3.3838562290802437e-21, -4.5815609194445606e-21, -4.6243458970698525e-21, -3.6235621847299059e-21, -2.2275977276820130e-21, -9.0571714327157503e-22]],
        [[8.9084579537773161e-2, 6.4597988611735422e-2, 3.3928747331270785e-2, 1.2883590862913104e-2, 3.5308119569588254e-3, 6.9856129894441351e-4, 1.0038945601290387e-4, 1.0688266561336683e-5, 8.8542766140541836e-7, 6.3528878072260919e-8, 4.8247759747177579e-9, 4.7265329897913368e-10], [-1.7466052578751132e-3, -1.8667895528196211e-3, -1.6300976620320850e-3, -1.0078910407347723e-3, -4.2862368082929805e-4, -1.2603100022530181e-4, -2.6028781382352632e-5, -3.8795694584450358e-6, -4.3935741575397886e-7, -4.1836471688785432e-8, -4.0154423775706125e-9, -4.5742670346628253e-10], [1.8580737737193845e-5, 3.5065261767356478e-5, 4.6194199622055905e-5, 3.8742588564594027e-5, 2.1584902157263404e-5, 8.2381412605450674e-6, 2.2055138684117970e-6, 4.2638335129939893e-7, 6.2566107642117573e-8, 7.6538512132618954e-9, 9.1725626768897711e-10, 1.2180194579678420e-10], [-2.0910601650057768e-7, -6.4394586893653895e-7, -1.1486948438080105e-6, -1.2498493869049817e-6, -8.8944072757152211e-7, -4.2960713944409705e-7, -1.4487082335457708e-7, -3.5233967157924950e-8, -6.5016264002702204e-9, -9.9493132279763924e-10, -1.4584621010913923e-10, -2.2307935328164698e-11], [2.4114909560633100e-9, 1.1226571567487500e-8, 2.6280878213049134e-8, 3.6358774066453612e-8, 3.2307483053585589e-8, 1.9289199689251077e-8, 8.0058059663158011e-9, 2.3944979329834940e-9, 5.4336430101295799e-10, 1.0180351552529979e-10, 1.7911323610275208e-11, 3.1148562834345983e-12], [-2.8370732037806249e-11, -1.8754976532079082e-10, -5.6536905978851465e-10, -9.7667816617698117e-10, -1.0646038454293274e-9, -7.7245111611607541e-10, -3.8798730942241091e-10, -1.4028406220916700e-10, -3.8465443121243515e-11, -8.6686579272361418e-12, -1.8004831640907842e-12, -3.5171607101269240e-13], [3.2754955039004448e-13, 3.0273656354622921e-12, 1.1579267886667777e-11, 2.4600272263060165e-11, 3.2435550770110590e-11, 2.8216236246008839e-11, 1.6920393739616960e-11, 7.2933595315913492e-12, 2.3815799461481427e-12, 6.3597222082968649e-13, 1.5369963743430030e-13, 3.3362267273285687e-14], [-3.9510791050994546e-15, -4.7521669849990817e-14, -2.2729363593470503e-13, -5.8680047856073280e-13, -9.2534059262355786e-13, -9.5438813142105597e-13, -6.7559464625436560e-13, -3.4310454353837530e-13, -1.3178169236498247e-13, -4.1160210937222373e-14, -1.1428627525981674e-14, -2.7299969888223859e-15], [4.2406284851951034e-17, 7.2748239376749329e-16, 4.3064234354811495e-15, 1.3361845421178014e-14, 2.4949715062886218e-14, 3.0216209791983066e-14, 2.5004023444307858e-14, 1.4809814723767317e-14, 6.6186312504193665e-15, 2.3904156501288783e-15, 7.5401954260635730e-16, 1.9651924514566372e-16], [-5.4880532076135011e-19, -1.0906043021166585e-17, -7.8948829831380011e-17, -2.9194855278348402e-16, -6.4011140225802409e-16, -9.0268519348769283e-16, -8.6574047690743021e-16, -5.9267498772607307e-16, -3.0524548293704529e-16, -1.2618500572967172e-16, -4.4765424467399920e-17, -1.2632613904877703e-17], [6.4667547627836290e-21, 1.6044183699403979e-19, 1.4073700056196566e-18, 6.1498839150954343e-18, 1.5711276236367816e-17, 2.5604993742273849e-17, 2.8243458502238811e-17, 2.2167896851086498e-17, 1.3044040171619002e-17, 6.1155106320316303e-18, 2.4180603965278944e-18, 7.3378866302853991e-19], [-4.2145755973707547e-24, -2.3089264481318259e-21, -2.4481831569292458e-20, -1.2535216118164767e-19, -3.7049552440002358e-19, -6.9303692094786501e-19, -8.7309285544660229e-19, -7.7992560280356154e-19, -5.2020694672222256e-19, -2.7430440279732461e-19, -1.1989931703211585e-19, -3.8887065990404383e-20], [3.0031253987497129e-24, 3.3044367069647034e-23, 4.1360398191281954e-22, 2.4766814723651814e-21, 8.4218113266762816e-21, 1.7970867179836228e-20, 2.5692753049615068e-20, 2.5945424153801743e-20, 1.9475193959922179e-20, 1.1461931887036002e-20, 5.4975117880681104e-21, 1.8951230035521124e-21], [3.2262607912898878e-26, -4.5987794544212017e-25, -6.9037888295053708e-24, -4.7625527810509478e-23, -1.8501845198057459e-22, -4.4768175117650607e-22, -7.2196344086210175e-22, -8.1891743675601017e-22, -6.8703075840368213e-22, -4.4805090146102877e-22, -2.3416748127664632e-22, -8.5358329362105572e-23]],
        [[8.5732505114264145e-2, 6.1122444124459471e-2, 3.0998990481482315e-2, 1.1136373699719281e-2, 2.8177312168521863e-3, 4.9913602546556929e-4, 6.1693382206529565e-5, 5.3514180408225663e-6, 3.3570191460715835e-7, 1.6637219239755169e-8, 8.0437705304069447e-10, 5.2176961205465259e-11], [-1.6073810440396367e-3, -1.6143847294841938e-3, -1.3093039912783887e-3, -7.4935424396303465e-4, -2.9123136240980211e-4, -7.6473704487295593e-5, -1.3633688476682023e-5, -1.6728993214847295e-6, -1.4624553271981564e-7, -9.9203438746665034e-9, -6.3227103661025913e-10, -4.9644347490002617e-11], [1.6285530948417521e-5, 2.8303535423761847e-5, 3.4603288696547216e-5, 2.6680729525071459e-5, 1.3426818747977619e-5, 4.5231745236528726e-6, 1.0366895141778489e-6, 1.6461107887372325e-7, 1.8764710083944442e-8, 1.6656390285506600e-9, 1.3689120880772093e-10, 1.2990088977896655e-11], [-1.7466942521347681e-7, -4.9079032776371932e-7, -8.0547434639011942e-7, -7.9712541788181231e-7, -5.0798336930814700e-7, -2.1522342613299245e-7, -6.1901445832946840e-8, -1.2363123322597254e-8, -1.7824815833615143e-9, -2.0094444088478783e-10, -2.0756176639295137e-11, -2.3413368896775951e-12], [1.9144487985775587e-9, 8.1065674063759193e-9, 1.7307617260158438e-8, 2.1612329843990411e-8, 1.7090754959463239e-8, 8.9064659621412678e-9, 3.1431595467729050e-9, 7.7207438418997606e-10, 1.3761495234953835e-10, 1.9251255178192966e-11, 2.4442416598304607e-12, 3.2224749224177877e-13], [-2.1700193590531912e-11, -1.2855264089045204e-10, -3.5054937051824451e-10, -5.4336722082212368e-10, -5.2447892319202126e-10, -3.3087234386036184e-10, -1.4101211357371238e-10, -4.1902054277451836e-11, -9.0725392591662852e-12, -1.5457805845069734e-12, -2.3670884711384355e-13, -3.5919692988541979e-14], [2.3331451631294545e-13, 1.9714509976673765e-12, 6.7838291549756691e-12, 1.2860877225210247e-11, 1.4949073849535920e-11, 1.1271069652790061e-11, 5.7266926669524750e-12, 2.0311107378954287e-12, 5.2656126720246675e-13, 1.0756894651419743e-13, 1.9545416419881084e-14, 3.3678278936584411e-15], [-2.8578629214210742e-15, -2.9459403551478831e-14, -1.2590101176034132e-13, -2.8891247120990344e-13, -4.0031626360364819e-13, -3.5701496283509805e-13, -2.1396332639902364e-13, -8.9561816374212734e-14, -2.7462386040069669e-14, -6.6364598801799998e-15, -1.4105841875749673e-15, -2.7271115145481844e-16], [2.7686828629191374e-17, 4.2959587358094371e-16, 2.2630398720231304e-15, 6.2140417234654668e-15, 1.0163546692032406e-14, 1.0623555352931552e-14, 7.4407365979890847e-15, 3.6400397457175828e-15, 1.3061161986315578e-15, 3.6897454413173778e-16, 9.0594494042751375e-17, 1.9445588194699577e-17], [-2.4621793806157636e-19, -6.1270309136523243e-18, -3.9431422268927554e-17, -1.2852078296104097e-16, -2.4617877668941977e-16, -2.9921927832462886e-16, -2.4294217247148914e-16, -1.3770400921203419e-16, -5.7274648596118227e-17, -1.8715851635371107e-17, -5.2491582769730889e-18, -1.2392499987210724e-18], [9.9284701110112359e-21, 8.6688473337212049e-20, 6.6443594998988604e-19, 2.5634284003890630e-18, 5.7161393719394578e-18, 8.0237878244535804e-18, 7.4974907875442220e-18, 4.8858810846552756e-18, 2.3355412026314383e-18, 8.7445002603645767e-19, 2.7734234672803534e-19, 7.1419130104242818e-20], [1.6676047797550867e-22, -1.1763196233275619e-21, -1.1146714891051428e-20, -4.9736123644885302e-20, -1.2785379449070095e-19, -2.0583543715566554e-19, -2.1987700825378386e-19, -1.6357529487106765e-19, -8.9168103249158973e-20, -3.7922582086719068e-20, -1.3478004307769303e-20, -3.7576416505447716e-21], [3.5142638216359339e-24, 1.6178246279732369e-23, 1.7683061963970360e-22, 9.3254146411509678e-22, 2.7601841989206466e-21, 5.0698100318079111e-21, 6.1541764080228677e-21, 5.1927833417504316e-21, 3.2050223896325254e-21, 1.5360841059783202e-21, 6.0672810943835843e-22, 1.8191538139727813e-22], [-4.0091967876406146e-26, -2.2177546677358326e-25, -2.8084471068552451e-24, -1.7072731258036887e-23, -5.7704836733078490e-23, -1.2022062245914387e-22, -1.6487997198403205e-22, -1.5682157225490638e-22, -1.0884639661120569e-22, -5.8347230762001404e-23, -2.5413677422876950e-23, -8.1439272536789711e-24]],
        [[8.2641736833000766e-2, 5.8102890301057568e-2, 2.8629605490723462e-2, 9.8244865731502454e-3, 2.3262052137038408e-3, 3.7562533009339928e-4, 4.0854841828733127e-5, 2.9676919644358686e-6, 1.4510904618267792e-7, 5.0610721201164761e-9, 1.5273607024679047e-10, 6.0796767625309209e-12], [-1.4849913344748525e-3, -1.4094893806351513e-3, -1.0669135468523846e-3, -5.6902101926320180e-4, -2.0423844559965111e-4, -4.8618363183162142e-5, -7.6307772146575891e-6, -7.8936093474534996e-7, -5.4606652314236338e-8, -2.6805402348809071e-9, -1.1151265980452918e-10, -5.6522126862104614e-12], [1.4359878151824594e-5, 2.3115060350740792e-5, 2.6393466227716868e-5, 1.8879061232438302e-5, 8.6796970153714299e-6, 2.6168843986169937e-6, 5.2214579992672016e-7, 6.9431461289073162e-8, 6.2696530552562266e-9, 4.0814240209760189e-10, 2.2588245320988680e-11, 1.4451749964690338e-12], [-1.4723151378415701e-7, -3.7933779896024460e-7, -5.7686077841256763e-7, -5.2389105422940903e-7, -3.0219542435864251e-7, -1.1377846876929418e-7, -2.8344431891290507e-8, -4.7292456988255401e-9, -5.4138495764249227e-10, -4.5269136247081022e-11, -3.2317731906133809e-12, -2.5511356394544917e-13], [1.5304527006426632e-9, 5.9490920596113277e-9, 1.1676529716200767e-8, 1.3276602204183996e-8, 9.4412022517868736e-9, 4.3475143020819240e-9, 1.3230795305793472e-9, 2.7094642739419795e-10, 3.8432914571429174e-11, 4.0287682290613396e-12, 3.6170685841695549e-13, 3.4469912283645720e-14], [-1.6965818123717701e-11, -8.9764917411362938e-11, -2.2300658643472209e-10, -3.1297147212266436e-10, -2.7030215609416235e-10, -1.5001843417681451e-10, -5.4957209904171636e-11, -1.3599724412050038e-11, -2.3498430770995597e-12, -3.0294833506243563e-13, -3.3491841140460897e-14, -3.7797973962960388e-15], [1.6500758353070316e-13, 1.3101327305271875e-12, 4.0907074553538645e-12, 6.9793485842926276e-12, 7.2218922515570890e-12, 4.7713831285121661e-12, 2.0785027983592883e-12, 6.1363020317943396e-13, 1.2735375544723113e-13, 1.9874047414602440e-14, 2.6573389402565990e-15, 3.4926129416135009e-16], [-2.0202560970095767e-15, -1.8661356144190052e-14, -7.1895288019822241e-14, -1.4790574674699781e-13, -1.8179611576721817e-13, -1.4165919874911423e-13, -7.2659261457471508e-14, -2.5320632503081889e-14, -6.2377071458152442e-15, -1.1623036688404076e-15, -1.8505891435113900e-16, -2.7914935878270942e-17], [2.8091508060767786e-17, 2.6077483961729085e-16, 1.2231491684130104e-15, 3.0057054160598978e-15, 4.3503477549341759e-15, 3.9643221481385456e-15, 2.3735458583852051e-15, 9.6736675993189061e-16, 2.7996151433849911e-16, 6.1548782959875722e-17, 1.1510358894018844e-17, 1.9672639779474633e-18], [3.3236356285455652e-19, -3.5022252454381610e-18, -2.0601515760912454e-17, -5.9193596668429894e-17, -9.9696366642148360e-17, -1.0534956526744480e-16, -7.3052735972252165e-17, -3.4535568252100496e-17, -1.1634284097963583e-17, -2.9857827114271810e-18, -6.4789870352528794e-19, -1.2405220278512605e-19], [1.9289044289399135e-20, 4.8538330752513450e-20, 3.1921144661910398e-19, 1.1116291568201674e-18, 2.1892175217564062e-18, 2.6711854233784333e-18, 2.1315695892590548e-18, 1.1603685710840453e-18, 4.5127465377532620e-19, 1.3389945507190381e-19, 3.3346045420731540e-20, 7.0810021605603012e-21], [1.9582878867040028e-22, -6.2486319348809690e-22, -5.2890288189765288e-21, -2.0654801557003424e-20, -4.6522725402466483e-20, -6.4970556839527289e-20, -5.9268540393973721e-20, -3.6902052230474204e-20, -1.6443052177881082e-20, -5.5915254640969870e-21, -1.5823423590623298e-21, -3.6932252855112089e-22], [-4.5224360598118542e-24, 7.6744235120285056e-24, 8.2193174606820760e-23, 3.7036687086114826e-22, 9.5541833454631889e-22, 1.5203839063921475e-21, 1.5767117291104929e-21, 1.1159138879542988e-21, 5.6575081821014970e-22, 2.1871710017047833e-22, 6.9699643253599545e-23, 1.7737789045501186e-23], [-2.9378574703816495e-25, -1.1902348833456693e-25, -1.0550513046750133e-24, -6.3179799711660474e-24, -1.8970409721542892e-23, -3.4310560511692210e-23, -4.0242984734883381e-23, -3.2186571459080625e-23, -1.8443509333642009e-23, -8.0440651992773658e-24, -2.8621935000734509e-24, -7.8832025202883954e-25]],
        [[7.9781316065978641e-2, 5.5455475958800489e-2, 2.6687043790644265e-2, 8.8198380807904314e-3, 1.9772582453262081e-3, 2.9570642304256031e-4, 2.8901645593198047e-5, 1.8057769001378409e-6, 7.1040483574054657e-8, 1.7950429025192796e-9, 3.3720594882095748e-11, 7.6067631175472578e-13], [-1.3767876162895529e-3, -1.2412851202856018e-3, -8.8058653479843818e-4, -4.3994692751696324e-4, -1.4709549254120699e-4, -3.2155519831253475e-5, -4.5230916634354396e-6, -4.0367262675913160e-7, -2.2709936664936641e-8, -8.2679686182956183e-10, -2.2388624586862984e-11, -6.8471411879361282e-13], [1.2729475265755793e-5, 1.9079961167089470e-5, 2.0460482393133767e-5, 1.3686415832703886e-5, 5.8076835644648868e-6, 1.5868971452001795e-6, 2.7995989350682952e-7, 3.1773618894329482e-8, 2.3224424106110200e-9, 1.1289287697304873e-10, 4.1795401698474700e-12, 1.6970402886422446e-13], [-1.2526084041222962e-7, -2.9696836110017805e-7, -4.2099593684377723e-7, -3.5367482566152192e-7, -1.8645210419223655e-7, -6.3128597598832936e-8, -1.3821451919390700e-8, -1.9600970199837751e-9, -1.8149585502993396e-10, -1.1410869175086473e-11, -5.5753047014855196e-13, -2.9146170750407086e-14], [1.2267485383498137e-9, 4.4303254278926521e-9, 8.0553474705718447e-9, 8.4055720565265235e-9, 5.4252459190087340e-9, 2.2325083338074654e-9, 5.9382700141630496e-10, 1.0295498661372658e-10, 1.1805436134844126e-11, 9.3644769865348047e-13, 5.8718617514867215e-14, 3.8447565574481532e-15], [-1.3566173168147673e-11, -6.3753310799692621e-11, -1.4517079020627551e-10, -1.8599585619693966e-10, -1.4512750283093477e-10, -7.1652817718796617e-11, -2.2851080719885377e-11, -4.7750450068925636e-12, -6.6720770111574229e-13, -6.5520868893213464e-14, -5.1542879087221934e-15, -4.1282538579063122e-16], [1.2395379368150875e-13, 8.8787620087847475e-13, 2.5293595993023036e-12, 3.9164337139635247e-12, 3.6417355154648010e-12, 2.1307844419823101e-12, 8.0525473898275641e-13, 2.0036817742197551e-13, 3.3662243027117683e-14, 4.0285161105156800e-15, 3.9005980869456142e-16, 3.7445817331901269e-17], [-7.7050480123312822e-16, -1.2007248127723945e-14, -4.2549171245150331e-14, -7.8743007297285133e-14, -8.6428893217577495e-14, -5.9386200429803624e-14, -2.6348557974880112e-14, -7.7292921380796104e-15, -1.5437932024559081e-15, -2.2214794770227052e-16, -2.6041255615355927e-17, -2.9441520846039293e-18], [5.4970905587267519e-17, 1.6385549471510463e-16, 6.6461993034778317e-16, 1.4963841174281367e-15, 1.9453408567054435e-15, 1.5630604860028603e-15, 8.0848192972712814e-16, 2.7726286455323851e-16, 6.5198104354700845e-17, 1.1148923799016237e-17, 1.5595147403500144e-18, 2.0447189021254249e-19], [1.1471129686221295e-18, -2.0219338735411394e-18, -1.1483157201307024e-17, -2.8642326367832348e-17, -4.2436438679334103e-17, -3.9262209289941117e-17, -2.3460546931794781e-17, -9.3302604752263916e-18, -2.5604206376887894e-18, -5.1486391056474682e-19, -8.4835001841057285e-20, -1.2725819839173038e-20], [1.6440521250970048e-20, 2.7237540374350240e-20, 1.5854093524133927e-19, 5.0190317194951112e-19, 8.8009323340727705e-19, 9.4144271388835936e-19, 6.4707734781524345e-19, 2.9648330376469778e-19, 9.4207726423630571e-20, 2.2066277156912700e-20, 4.2333710495096554e-21, 7.1788684318986857e-22], [-5.0008221228885555e-22, -3.8100639435901591e-22, -2.2598353414170473e-21, -8.6931300756986197e-21, -1.7703925762011093e-20, -2.1706875009669343e-20, -1.7052621127854009e-20, -8.9443800230732029e-21, -3.2671425527271534e-21, -8.8369415994252043e-22, -1.9532098688940049e-22, -3.7045852705846811e-23], [-2.6192693504723778e-23, 2.9190120059599759e-24, 5.0668508952033188e-23, 1.6176835817564037e-22, 3.5051683825233183e-22, 4.8358754613402918e-22, 4.3109437521272599e-22, 2.5729275457191502e-22, 1.0731857621174748e-22, 3.3252495667083006e-23, 8.3863407526547141e-24, 1.7621147735274988e-24], [-4.8057950096616567e-25, -6.8190827063529734e-26, -2.8300952672919520e-25, -2.3498019502710586e-24, -6.5321135706678568e-24, -1.0372715924368247e-23, -1.0475609817644639e-23, -7.0774187960263304e-24, -3.3495950019938558e-24, -1.1798698200681025e-24, -3.3645177233702508e-25, -7.7628907236964821e-26]],
        [[7.7125039314912729e-2, 5.3115051767368156e-2, 2.5074970266075539e-2, 8.0374422528660360e-3, 1.7233569930860785e-3, 2.4205839376857600e-4, 2.1664691378020610e-5, 1.1940028572612230e-6, 3.9044960085303583e-8, 7.4161402258885030e-10, 8.8217734402576936e-12, 1.0464499643604323e-13], [-1.2806502494359186e-3, -1.1017847737109103e-3, -7.3512050818833671e-4, -3.4539857549316802e-4, -1.0830142638496608e-4, -2.1976578401056179e-5, -2.8142945584888077e-6, -2.2142889198240175e-7, -1.0418964326048626e-8, -2.9029058257194713e-10, -5.1887298465805332e-12, -8.9938626103376670e-14], [1.1335672648551863e-5, 1.5903036864910356e-5, 1.6095703225397159e-5, 1.0141200541631261e-5, 4.0087017816445822e-6, 1.0040524142698783e-6, 1.5885203394022335e-7, 1.5666028437683746e-8, 9.4774686033804635e-10, 3.5220479436413919e-11, 8.7809021663708722e-13, 2.1362316286517975e-14], [-1.0764505300916155e-7, -2.3523033634219803e-7, -3.1240574470311277e-7, -2.4450123779578190e-7, -1.1883195317100762e-7, -3.6572539157733032e-8, -7.1330721005448475e-9, -8.7438907380515970e-10, -6.6803216129049493e-11, -3.2190337114523360e-12, -1.0780710402798319e-13, -3.5368770322303889e-15], [9.8462746413429761e-10, 3.3439186621816001e-9, 5.6734220323336449e-9, 5.4713828369993468e-9, 3.2318333730546443e-9, 1.2006373275749408e-9, 2.8265559808272268e-10, 4.2123416078782331e-11, 3.9722201187739518e-12, 2.4205803874117748e-13, 1.0570929725004873e-14, 4.5209257696810465e-16], [-1.0610226910540111e-11, -4.5946729012452360e-11, -9.6701684608809102e-11, -1.1387863251861792e-10, -8.0933191012448748e-11, -3.5901605761920158e-11, -1.0087006066099203e-11, -1.8049007594845426e-12, -2.0703227047154242e-13, -1.5668976925768152e-14, -8.7166237880843865e-16, -4.7238073839806367e-17], [1.3374664101846200e-13, 6.1545712884074645e-13, 1.5813879477040008e-12, 2.2508931852182895e-12, 1.9044585267164982e-12, 9.9844912211392894e-13, 3.3134288997209139e-13, 7.0403284335382356e-14, 9.7013237738227301e-15, 8.9823720710461097e-16, 6.2415881886210307e-17, 4.1842419089099302e-18], [1.7075989771945708e-15, -7.7490252760192188e-15, -2.6825161891642059e-14, -4.4108955402360482e-14, -4.3097133689470875e-14, -2.6241469414244245e-14, -1.0164313034991303e-14, -2.5383131477366748e-15, -4.1566637058570729e-16, -4.6478263684235822e-17, -3.9665816008058645e-18, -3.2219732742556850e-19], [9.8823387514398366e-17, 1.0692887396257813e-16, 3.4760821174175023e-16, 7.5250710461655064e-16, 9.0110948157566152e-16, 6.4773292615673645e-16, 2.9280625296124018e-16, 8.5426480611592682e-17, 1.6480476978274549e-17, 2.2006605035447491e-18, 2.2726792746522512e-19, 2.1968384638693914e-20], [9.1400433571542070e-19, -1.2375543313208563e-18, -6.4572322027360117e-18, -1.4294967003233795e-17, -1.8855794964117189e-17, -1.5420826958201904e-17, -8.0165765014402717e-18, -2.7079639166720008e-18, -6.1023942511416522e-19, -9.6330315876850862e-20, -1.1879790287714260e-20, -1.3450649286616186e-21], [-4.0840404833697092e-20, 1.2497208154319313e-20, 1.0846291077871807e-19, 2.5553554002005109e-19, 3.7692763232863890e-19, 3.5122988492001939e-19, 2.0916225057509078e-19, 8.1320323147241052e-20, 2.1250239192382071e-20, 3.9295136341632576e-21, 5.7180242681891167e-22, 7.4776289275579450e-23], [-2.2245508023094111e-21, -3.0830063792335399e-22, -1.0494461924088319e-22, -3.1413732330523009e-21, -6.8328716098325082e-21, -7.6164193512907550e-21, -5.2180307310971651e-21, -2.3247997956582982e-21, -6.9982864354776293e-22, -1.5032838152573940e-22, -2.5531220385040712e-23, -3.8084412541585848e-24], [-4.0205950275907115e-23, 5.1621141832607476e-25, 3.8714764914959224e-23, 8.0210463556767963e-23, 1.3730795683270420e-22, 1.6294133341100334e-22, 1.2548280244569501e-22, 6.3558473833378064e-23, 2.1896603542023123e-23, 5.4215018575402938e-24, 1.0639616443967403e-24, 1.7902015533024855e-25], [1.7451552836868827e-25, -1.9726410750777290e-26, -3.3831805095183857e-25, -1.1013942556681973e-24, -2.4159998003762331e-24, -3.3217406445238368e-24, -2.9019440338576299e-24, -1.6654710207489614e-24, -6.5283494523404396e-25, -1.8492997524902771e-25, -4.1539316387258776e-26, -7.8027966034338744e-27]],
        [[7.4650512881178826e-2, 5.1030366832433800e-2, 2.3722623574070953e-2, 7.4194309051801508e-3, 1.5348566046734325e-3, 2.0494711033895153e-4, 1.7081539633221296e-5, 8.4983965704141655e-7, 2.3847642175712610e-8, 3.5498013742520510e-10, 2.7749774285955848e-12, 1.6345753310929556e-14], [-1.1948788988461810e-3, -9.8500695367471581e-4, -6.1994196105198118e-4, -2.7467274549989611e-4, -8.1165395002780131e-5, -1.5420268552674706e-5, -1.8219219219773656e-6, -1.2886158986581026e-7, -5.2116455211417814e-9, -1.1513862701838936e-10, -1.4008221719578181e-12, -1.3127874687456410e-14], [1.0132078887824832e-5, 1.3373377956426443e-5, 1.2833690730305149e-5, 7.6657448230375647e-6, 2.8466072882812374e-6, 6.6037173182799573e-7, 9.4907280810283771e-8, 8.2685713988047778e-9, 4.2307712158534027e-10, 1.2345890372026979e-11, 2.1140221028021878e-13, 2.9403899717629027e-15], [-9.3391321683564449e-8, -1.8834387114204144e-7, -2.3527634827001688e-7, -1.7262093366641403e-7, -7.7947291692006749e-8, -2.2018032164923446e-8, -3.8730728216865087e-9, -4.1696670199022217e-10, -2.6819597891925174e-11, -1.0136093803945628e-12, -2.3578161387530193e-14, -4.6344101117525878e-16], [8.1031273885859387e-10, 2.5569530680704374e-9, 4.0637765482202342e-9, 3.6462690991336477e-9, 1.9870111995766443e-9, 6.7295274649054425e-10, 1.4190486817388572e-10, 1.8447750029831526e-11, 1.4563985872635993e-12, 6.9490401845173175e-14, 2.1295482398225384e-15, 5.6825553188366735e-17], [-6.4554031667896407e-12, -3.3431142278932490e-11, -6.6689200214450440e-11, -7.2367278319823899e-11, -4.6984252816208653e-11, -1.8843783164272901e-11, -4.7095687143490314e-12, -7.3094363729359085e-13, -6.9914261292747101e-14, -4.1424777158441576e-15, -1.6343755100148170e-16, -5.7304782278215545e-18], [2.2726849489427215e-13, 4.4022694420399792e-13, 9.5712938271698383e-13, 1.2883981294783111e-12, 1.0172284850855659e-12, 4.8653276231945654e-13, 1.4388540523567275e-13, 2.6481641516696842e-14, 3.0375704146524395e-15, 2.2044110516720117e-16, 1.0983462456665990e-17, 4.9229009607057766e-19], [4.8590516386440323e-15, -4.9698045799110065e-15, -1.8563476474742942e-14, -2.6500633702206340e-14, -2.2700848542056659e-14, -1.2224236943294749e-14, -4.1588059445136244e-15, -8.9339885829102680e-16, -1.2143480857836875e-16, -1.0659397400913959e-17, -6.5959510302684776e-19, -3.6911633565465503e-20], [7.4233427823433280e-17, 6.8165534257052416e-17, 1.9645862102954581e-16, 3.9740217886612051e-16, 4.3602837545093144e-16, 2.8186085282998910e-16, 1.1236768776624896e-16, 2.8192811898674382e-17, 4.5124216436032628e-18, 4.7426851174458429e-19, 3.5918790797250425e-20, 2.4587065398500374e-21], [-3.1406907034439948e-18, -1.0019438459550727e-18, -1.7584589935515834e-18, -5.9065438176522093e-18, -8.2325736655877732e-18, -6.2734355636320451e-18, -2.8956158852051444e-18, -8.4122705714643668e-19, -1.5726911858063880e-19, -1.9603198768779535e-20, -1.7933422275663699e-21, -1.4747344477800215e-22], [-1.6870256265899405e-19, -4.4803825098450534e-22, 1.3440405644668574e-19, 1.8183513719256080e-19, 1.8482546127208495e-19, 1.4076095859865018e-19, 7.1996564820568518e-20, 2.3889519006635080e-20, 5.1747173614396842e-21, 7.5830390098554821e-22, 8.2801034501197061e-23, 8.0501547425525829e-24], [-3.0429926357623980e-21, -2.6567598027130487e-22, 9.2814564120960563e-22, -6.9713217149490760e-22, -2.5879114744852505e-21, -2.7784537913168876e-21, -1.6902524606993918e-21, -6.4624916414450774e-22, -1.6152372944993222e-22, -2.7613580957929039e-23, -3.5598472766241727e-24, -4.0338009604824401e-25], [3.0812364277977137e-23, 2.4876699063860661e-24, -7.4443808393154136e-24, 1.7349958473069518e-23, 4.9114902213587792e-23, 5.6709494147661115e-23, 3.8673008563157164e-23, 1.6784107953051265e-23, 4.8052140328297886e-24, 9.5117284092746162e-25, 1.4331796019780393e-25, 1.8686608553842199e-26], [3.0528272983471251e-24, 1.2566282344894454e-25, -1.7083395889744773e-24, -1.5965972357304435e-24, -1.2868426909627298e-24, -1.1813712593278692e-24, -8.5853737812879258e-25, -4.1896594174726520e-25, -1.3659796863949316e-25, -3.1086681753753673e-26, -5.4220500612878574e-27, -8.0387524380559085e-28]],
        [[7.2338413316884898e-2, 4.9160642534307914e-2, 2.2577186701473178e-2, 6.9254855184555775e-3, 1.3926759398912405e-3, 1.7866547072158251e-4, 1.4072967420546285e-5, 6.4534924366877454e-7, 1.6012701712796403e-8, 1.9507399569991093e-10, 1.0577065066353852e-12, 3.0232396672856099e-15], [-1.1180922898232464e-3, -8.8641224871783698e-4, -5.2755443841191622e-4, -2.2074104427721945e-4, -6.1657306242000165e-5, -1.1036149266315298e-5, -1.2160832242435602e-6, -7.8632163839529523e-8, -2.8035077059297647e-9, -5.0954646108439705e-11, -4.4127897180306676e-13, -2.1942894449064494e-15], [9.0860065555377235e-6, 1.1338394420853926e-5, 1.0360072162285237e-5, 5.9013836266050440e-6, 2.0747511024408267e-6, 4.5009804975987271e-7, 5.9459803724875796e-8, 4.6458973828714645e-9, 2.0516910448081841e-10, 4.8329539786083321e-12, 5.8587611350104378e-14, 4.5337269605703257e-16], [-8.1113577796563165e-8, -1.5225085901809572e-7, -1.7984241352459780e-7, -1.2440778861335207e-7, -5.2536918465230151e-8, -1.3731725570432944e-8, -2.2018444472602250e-9, -2.1119569901072133e-10, -1.1660287285465173e-11, -3.5440791706923305e-13, -5.8632279447734515e-15, -6.6898281024759049e-17], [7.4752537160691828e-10, 1.9838435043588421e-9, 2.9211653903516978e-9, 2.4548068202528337e-9, 1.2471317564691316e-9, 3.8962693991674221e-10, 7.4567315301638095e-11, 8.5865989212565583e-12, 5.7812173384815023e-13, 2.2075511350404619e-14, 4.8298625801058438e-16, 7.7659335665368152e-18], [7.4346842410281290e-13, -2.4323025513937986e-11, -4.9264782330327982e-11, -4.9060626680526428e-11, -2.8849297914535549e-11, -1.0430112802530187e-11, -2.3268851125734996e-12, -3.1616460513461210e-13, -2.5582725052781448e-14, -1.2080861050413549e-15, -3.4202807502472046e-17, -7.4779523892467357e-19], [3.6902633158383057e-13, 3.2604660199482188e-13, 5.2361242898933222e-13, 7.0212486877607125e-13, 5.4143645104037271e-13, 2.4313971316104072e-13, 6.5365179132785793e-14, 1.0595065958188785e-14, 1.0284001472689198e-15, 5.9463425144691923e-17, 2.1403789604063265e-18, 6.1755640560028466e-20], [3.9156063629009493e-15, -3.3885783689825590e-15, -1.2194032513847212e-14, -1.5841233724896107e-14, -1.2253820659368776e-14, -5.9305935836797960e-15, -1.7934012759919946e-15, -3.3541411915616508e-16, -3.8354487050118191e-17, -2.6786306085170515e-18, -1.2060472988870728e-19, -4.4753938143732981e-21], [-1.8336427258910901e-16, 2.9513088614210720e-17, 2.3594426091243941e-16, 3.0801051403664988e-16, 2.4988508754441751e-16, 1.3379854174219593e-16, 4.6041586703072339e-17, 9.9526408706424991e-18, 1.3349040514338726e-18, 1.1163539056962841e-19, 6.2014651459142710e-21, 2.8940553676002344e-22], [-1.1392672039564372e-17, -1.1844695349012670e-18, 3.9265266438729487e-18, 6.4766350290483536e-19, -2.6566465584357806e-18, -2.4724604541089312e-18, -1.0848089895211357e-18, -2.7782962545872560e-19, -4.3700935612384043e-20, -4.3428909483115309e-21, -2.9395799752491465e-22, -1.6913623375126078e-23], [-1.9290850149670673e-19, -5.8644320196557710e-21, 1.2550559044122833e-19, 1.3342022251900733e-19, 9.9703641300287869e-20, 6.0656816096010043e-20, 2.6392264946778060e-20, 7.5013729593776644e-21, 1.3581707825132290e-21, 1.5882015450986635e-22, 1.2946880321479399e-23, 9.0236462198130350e-25], [4.1173845641154750e-21, 1.3327877523834509e-22, -2.4923699119788072e-21, -2.4608795424110876e-21, -1.8015575655073979e-21, -1.1932628967552728e-21, -5.9001992440716624e-22, -1.9208472849259839e-22, -4.0122661166711751e-23, -5.4878049813885172e-24, -5.3317852365689740e-25, -4.4307132399653973e-26], [2.9998772341084454e-22, 1.6741531817459754e-23, -1.5102224547563207e-22, -1.0167076633735670e-22, -1.6303279062163027e-23, 1.4555579381141851e-23, 1.2021684428196440e-23, 4.6988849857218270e-24, 1.1325453555306477e-24, 1.7999212555094257e-25, 2.0637499126436736e-26, 2.0157230380885466e-27], [6.4317908532890387e-24, 4.0903267648340132e-25, -3.3570222411147048e-24, -2.7033766098685767e-24, -1.2250358946586617e-24, -5.5457303543442445e-25, -2.8125511010801518e-25, -1.1306896333727615e-25, -3.0686796040123020e-26, -5.6196936128400100e-27, -7.5317803122820296e-28, -8.5324094269481386e-29]],
        [[7.0171980786071869e-2, 4.7473097831617589e-2, 2.1598638374302260e-2, 6.5269125067263848e-3, 1.2841760490566768e-3, 1.5973765407856458e-4, 1.2045098223665606e-5, 5.1860671487504535e-7, 1.1693873732556580e-8, 1.2164337558262484e-10, 4.8822590200461610e-13, 6.9610128381574445e-16], [-1.0490899873224569e-3, -8.0250789203359504e-4, -4.5258269370174064e-4, -1.7890313082703151e-4, -4.7281629887863857e-5, -8.0025512196514465e-6, -8.2886811926856832e-7, -4.9671212384516870e-8, -1.5962877852628217e-9, -2.4733003886472100e-11, -1.6090544063452188e-13, -4.3378753360579749e-16], [8.1865171976821570e-6, 9.6870724658931838e-6, 8.4518160453071394e-6, 4.6143747860071369e-6, 1.5469976215437194e-6, 3.1672936124644348e-7, 3.8896170383179179e-8, 2.7645586321858721e-9, 1.0738178492864008e-10, 2.0976350390643078e-12, 1.8680321507879736e-14, 8.0437159613737967e-17], [-6.8532930572646182e-8, -1.2400673775674701e-7, -1.4040212634831378e-7, -9.2195195782479332e-8, -3.6593959134551024e-8, -8.8981211103087089e-9, -1.3103102125076669e-9, -1.1322699790615797e-10, -5.4563460259236792e-12, -1.3668792813931610e-13, -1.6589563784315482e-15, -1.0881926503012454e-17], [8.5465654153056553e-10, 1.5683291295016439e-9, 2.0389455127675988e-9, 1.6121357165144552e-9, 7.7668050842660655e-10, 2.2813234583712761e-10, 4.0380071506538257e-11, 4.1985873011989025e-12, 2.4620685710326928e-13, 7.7118597164496832e-15, 1.2359924642211981e-16, 1.1766542034981556e-18], [9.8345910724756175e-12, -1.7570178972544279e-11, -3.9784855998769175e-11, -3.6367253954159380e-11, -1.9133592161198868e-11, -6.1714967354114454e-12, -1.2241148486720784e-12, -1.4611143357079160e-13, -1.0110701324608868e-14, -3.8733367208880882e-16, -8.0180587296793180e-18, -1.0676774959968158e-19], [3.2772853899978273e-13, 2.3780427873502402e-13, 3.1407301664417490e-13, 4.0567861340314138e-13, 3.0038566844069173e-13, 1.2643187887388211e-13, 3.1106065926644067e-14, 4.4921481564257993e-15, 3.7462645219856200e-16, 1.7575252621212877e-17, 4.6394818576897084e-19, 8.3836238396981640e-21], [-9.3527069175829979e-15, -3.1430356748598682e-15, -1.7776295917683720e-15, -4.8977812533111850e-15, -5.1951840120357941e-15, -2.6990170837204593e-15, -7.8361875930299378e-16, -1.3232598652173211e-16, -1.3010262772146639e-17, -7.3579231589857709e-19, -2.4372359375341908e-20, -5.8182118114523122e-22], [-6.4273749489329505e-16, -1.3247979216908423e-17, 4.1796613866038992e-16, 3.8505397720544129e-16, 2.0337236288878269e-16, 7.7026798490556829e-17, 2.0958281224772067e-17, 3.7931787510347239e-18, 4.2642923574768972e-19, 2.8678249236111540e-20, 1.1762622806350619e-21, 3.6239876717618825e-23], [-1.0303794883646577e-17, -9.9461958485597462e-19, 4.1311462907147518e-18, 1.9769933060231780e-18, -6.7372856182801171e-19, -9.7673258173240875e-19, -4.2094556076066206e-19, -9.6977181496954081e-20, -1.3038635399463541e-20, -1.0466283745785046e-21, -5.2631238563777089e-23, -2.0498192373076643e-24], [3.8741099903577193e-19, 2.4256866892101373e-20, -1.8618196522669063e-19, -1.1812883342660083e-19, -1.4025431540515681e-20, 1.5462768364639012e-20, 9.1246494508366295e-21, 2.4576419104363491e-21, 3.8224396921572147e-22, 3.6101186129211981e-23, 2.1993954307070817e-24, 1.0626600902848439e-25], [2.2570916957203076e-20, 1.3198270438683337e-21, -1.1821728807013827e-20, -9.1888950437703156e-21, -3.5468376713763820e-21, -9.8427284046750378e-22, -2.6254626818554683e-22, -6.3068324441540079e-23, -1.0758165859041518e-23, -1.1812812502947309e-24, -8.6320627097996857e-26, -5.0872180165449094e-27], [3.0279026897883381e-22, 2.5007574806952523e-23, -1.5084932506627415e-22, -1.1477747725698580e-22, -3.4142236855908500e-23, -2.7800461511393830e-25, 3.4293115740668222e-24, 1.3625365766800025e-24, 2.8513056321681056e-25, 3.6764664181031747e-26, 3.1967661354574567e-27, 2.2629428309542129e-28], [-1.3226836967859928e-23, -5.3167351467246296e-25, 6.9075845394018558e-24, 4.8744539869337299e-24, 1.4275562330023665e-24, 1.1004642682293617e-25, -6.6196396344469298e-26, -3.1263986555940992e-26, -7.3732237482343466e-27, -1.0942882888902224e-27, -1.1203929322511098e-28, -9.3893190289773375e-30]],
        [[6.8136864017783292e-2, 4.5941151060688712e-2, 2.0756105540294402e-2, 6.2027930009785265e-3, 1.2007296349883634e-3, 1.4596648367998888e-4, 1.0655412341203343e-5, 4.3775853828576395e-7, 9.1918335541047466e-9, 8.4933205173761792e-11, 2.7043559694643001e-13, 2.0974195793621630e-16], [-9.8663786153145648e-4, -7.3056189544634945e-4, -3.9121065597150810e-4, -1.4602697059251472e-4, -3.6477633143893183e-5, -5.8421922664546410e-6, -5.7123944903752449e-7, -3.2037033167200268e-8, -9.4488308912942395e-10, -1.2883663348392341e-11, -6.6634771472915846e-14, -1.0409857054497968e-16], [7.4536935718433203e-6, 8.3388747989374560e-6, 6.9378195814357535e-6, 3.6404424497238710e-6, 1.1709679909745925e-6, 2.2825447494066946e-7, 2.6354960405124435e-8, 1.7285137930295647e-9, 6.0168879993844168e-11, 1.0008603318778315e-12, 6.8172398224992331e-15, 1.6846312797258252e-17], [-5.2991323370870114e-8, -1.0144572071965805e-7, -1.1372370976863807e-7, -7.1711997598660980e-8, -2.6873357542003927e-8, -6.0916501592748607e-9, -8.2578042667816173e-10, -6.4618236940116762e-11, -2.7470263482954325e-12, -5.7857242692233165e-14, -5.3241731453283985e-16, -2.0398625462315741e-18], [1.0958781475904311e-9, 1.2665165289075609e-9, 1.3227159558414857e-9, 9.7833524938719180e-10, 4.5798468816126583e-10, 1.3023514185058358e-10, 2.1925744772470009e-11, 2.1136483807992525e-12, 1.1084599992329853e-13, 2.9322494696332706e-15, 3.5598290067354311e-17, 2.0167708564171040e-19], [1.2048393194082600e-11, -1.2990124032365978e-11, -3.1273475589824106e-11, -2.6871715418019323e-11, -1.2968659690186826e-11, -3.7957683237073580e-12, -6.7707456858747648e-13, -7.1708829200955224e-14, -4.2965266523847155e-15, -1.3594804329101516e-16, -2.1067859577754605e-18, -1.6985519369779545e-20], [-2.4464769736762738e-13, 1.4054860865713669e-13, 4.5746226063972613e-13, 4.4041890363140280e-13, 2.3977587001095219e-13, 8.0449425415409834e-14, 1.6660160203073327e-14, 2.0701694868632255e-15, 1.4747349368110221e-16, 5.6781986087225934e-18, 1.1204405355662283e-19, 1.2519641934069989e-21], [-3.0816051969394826e-14, -3.8251319023472680e-15, 1.1472518110858713e-14, 6.8193390373358737e-15, 4.9989797529979277e-16, -7.6013012702207561e-16, -3.0495956272703201e-16, -5.2298835633125061e-17, -4.6546746479362374e-18, -2.1949968756629701e-19, -5.4555844657148630e-21, -8.2303394418605887e-23], [-4.8478158922025496e-16, -1.5775332068309476e-17, 3.0258262150967796e-16, 2.6965346087633508e-16, 1.3037427896936515e-16, 4.2957677350001290e-17, 9.9849793770870720e-18, 1.5443373644356031e-18, 1.4679500226447263e-19, 8.0299445812223178e-21, 2.4600812158455397e-22, 4.8918384495323766e-24], [2.5226608595798381e-17, 1.2820983316490265e-18, -1.3721033543274965e-17, -1.0902923060060075e-17, -4.3462534506863006e-18, -1.1622012331924240e-18, -2.4372934099139084e-19, -3.9297060470214825e-20, -4.2410079864328796e-21, -2.7446604528173551e-22, -1.0335795847072890e-23, -2.6562828040689774e-25], [1.2561523028595649e-18, 8.5331826838356763e-20, -6.3565157565972599e-19, -4.7496291401713042e-19, -1.5209610043294374e-19, -2.0508663466417692e-20, 8.4312991844350349e-22, 7.1722813697394175e-22, 1.1166707646782566e-22, 8.8593278129556253e-24, 4.0769960832716883e-25, 1.3287000336441106e-26], [2.9137855996692869e-21, 6.1513829954599832e-22, -1.3971803438010055e-21, -1.6321527004103343e-21, -9.3397926457417218e-22, -3.5952081529591455e-22, -1.0384812853777168e-22, -2.1997117932237565e-23, -3.1195728921252960e-24, -2.7585583461370023e-25, -1.5185577382438051e-26, -6.1636820312334090e-28], [-1.4027071297157375e-21, -7.9114188948505742e-23, 7.2667384662101479e-22, 5.4360486666735339e-22, 1.8524963769336999e-22, 3.5315445180959926e-23, 4.5718589198524460e-24, 5.8962375325862574e-25, 8.0429059219032106e-26, 8.1338966150345867e-27, 5.3550594635576996e-28, 2.6664297352041407e-29], [-4.1402707447130350e-23, -3.1254059951543242e-24, 2.1051774837738362e-23, 1.6380661400671352e-23, 5.7436592642550035e-24, 1.0502024884161379e-24, 8.5707358319785843e-26, -3.2868024939480492e-27, -1.7295397678201009e-27, -2.2776440789618209e-28, -1.7939179183295530e-29, -1.0793530869155818e-30]],
        [[6.5679432262419105e-2, 4.4157915516114356e-2, 1.9832757300884380e-2, 5.8712695813703856e-3, 1.1210700586553819e-3, 1.3367324566860737e-4, 9.4961019459306349e-6, 3.7514684425187115e-7, 7.4242088172599339e-9, 6.2200551143161641e-11, 1.6352503481160629e-13, 7.3998204777161386e-17], [-1.4606029827345392e-3, -1.0427914186434245e-3, -5.2489386278749591e-4, -1.8204185371401759e-4, -4.2164141427732911e-5, -6.2711802036476026e-6, -5.6973310087469405e-7, -2.9563548737508418e-8, -7.9587187420192160e-10, -9.5818221319575303e-12, -4.0133650757550448e-14, -3.7305011694227271e-17], [1.7467980618805820e-5, 1.7793335105325348e-5, 1.3682609456149277e-5, 6.7864602194535232e-6, 2.0781566218830196e-6, 3.8450392425148469e-7, 4.1714598402583988e-8, 2.5255268056537535e-9, 7.8812145684018213e-11, 1.1155148227733067e-12, 5.7870745677762446e-15, 7.8679727368889721e-18], [-1.1716092478944808e-7, -3.2112679101338294e-7, -3.8135910422616980e-7, -2.3440498195367269e-7, -8.2642024959609228e-8, -1.7223583519603840e-8, -2.1046635391557325e-9, -1.4530214024429068e-10, -5.2920737428859180e-12, -9.0849552243386186e-14, -6.1269798161644639e-16, -1.2686672387284044e-18], [7.4581855669674454e-9, 6.3385435266726388e-9, 5.0217007187391149e-9, 3.3110723238972153e-9, 1.4887289051937294e-9, 4.1037974824439338e-10, 6.5965962186696112e-11, 5.9133551639559699e-12, 2.7743104806945592e-13, 6.1680079672494891e-15, 5.5724200381202011e-17, 1.7281462455371634e-19], [-1.4185637793325818e-10, -1.1242005043126720e-10, -1.0405404430697751e-10, -8.9828467455721693e-11, -4.9542228242628302e-11, -1.5843611758594568e-11, -2.8869403328411768e-12, -2.9280720667310744e-13, -1.5752581650918515e-14, -4.1377448872399207e-16, -4.6801378922720063e-18, -2.0613214978160235e-20], [-2.0903271740423955e-11, 3.0914983822032218e-13, 1.4207726511869831e-11, 1.1609657508868914e-11, 4.7282320433379767e-12, 1.1438478321946613e-12, 1.7222467237775725e-13, 1.6038536571741615e-14, 8.7832409496057545e-16, 2.5779845109422239e-17, 3.5725062026421436e-19, 2.1889011803070419e-21], [-2.4791140023955686e-13, -5.1908387844113917e-14, 5.5410212121493160e-14, 2.2631088039930552e-14, -1.2728884792739077e-14, -1.1275699354650366e-14, -3.3243157419291615e-15, -4.8425734711011056e-16, -3.6621748305876520e-17, -1.3927625911330166e-18, -2.4864098985446453e-20, -2.1021453710316260e-22], [6.9957164148956234e-14, 5.1505669005512959e-15, -3.4542682382065866e-14, -2.5634046604043160e-14, -8.1544449329667698e-15, -1.1827491963610013e-15, -3.2008833606397259e-17, 1.1888008296682073e-17, 1.5026377453338046e-18, 7.3140817484337640e-20, 1.6311522691829168e-21, 1.8484866957641494e-23], [2.6944834121538593e-15, 2.0182551324064042e-16, -1.3933723495286252e-15, -1.1110849805086755e-15, -4.1429192368921264e-16, -8.9339086514120071e-17, -1.2364612659704309e-17, -1.2077312181648710e-18, -8.5279837344184407e-20, -3.9136666800388365e-21, -1.0123115431130459e-22, -1.4996500008539858e-24], [-1.7343266580194653e-16, -9.8229369809766101e-18, 9.0141437903481112e-17, 6.7756046566072496e-17, 2.3234591066063104e-17, 4.4019610545917100e-18, 5.1271487098547085e-19, 4.4318938451891021e-20, 3.3152954501589287e-21, 1.8227645629529633e-22, 5.8587690747312632e-24, 1.1295982288425261e-25], [-1.3840525461720603e-17, -1.0298914056911254e-18, 7.0408941432254735e-18, 5.4626475633393922e-18, 1.9126908259506395e-18, 3.5475640385163392e-19, 3.3788392159017677e-20, 1.1511241470288752e-21, -6.2328019441794092e-23, -7.6866411280322309e-24, -3.2218442373569474e-25, -7.9489296136476496e-27], [2.3100980628942204e-19, 3.6716163784894901e-21, -1.2355297066502519e-19, -8.3024407103108383e-20, -2.3711117342157791e-20, -2.9411384218505819e-21, -2.0880709824689824e-23, 3.7441470228141945e-23, 5.1560306747500378e-24, 3.8025693396314277e-25, 1.7156643046441248e-26, 5.2493261229699247e-28], [5.3799692075067767e-20, 3.7251618096471040e-21, -2.7529316194048998e-20, -2.1149568775538394e-20, -7.3555042021643570e-21, -1.3739739961060525e-21, -1.4163718888934293e-22, -8.2395160586332575e-24, -3.4062602400695442e-25, -1.7052483873667905e-26, -8.6014109273112559e-28, -3.2531637775424335e-29]],
        [[6.2894701379848764e-2, 4.2203581964453336e-2, 1.8878870062693902e-2, 5.5531739357475937e-3, 1.0504862021584505e-3, 1.2362088254317809e-4, 8.6209587792456931e-6, 3.3161714518723451e-7, 6.3031547914359736e-9, 4.9384653944420297e-11, 1.1366154545733013e-13, 3.4267305470476793e-17], [-1.3248381460205324e-3, -9.1430391610751962e-4, -4.3241767931467119e-4, -1.3814576336070156e-4, -2.9139121868867173e-5, -3.9255764776708108e-6, -3.2220474707791914e-7, -1.5055708590946689e-8, -3.6187038729899234e-10, -3.8023763766817692e-12, -1.3033671784584085e-14, -7.6417572306037520e-18], [1.6601834203380143e-5, 1.4474984641480794e-5, 9.5751244690271466e-6, 4.2772648065006802e-6, 1.2148271967452608e-6, 2.1106400025662528e-7, 2.1514206877638290e-8, 1.2124963927309395e-9, 3.4474140836059809e-11, 4.2564523663768685e-13, 1.7431318768528284e-15, 1.3430239025824501e-18], [-4.5093742078585723e-8, -2.3740848607836357e-7, -3.0111285561592478e-7, -1.8233236266185145e-7, -6.1323364796007853e-8, -1.1906503287113378e-8, -1.3236687047746574e-9, -8.0836658832867144e-11, -2.5072179090695073e-12, -3.4522124308702865e-14, -1.6600043882045881e-16, -1.7378809127148120e-19], [4.8566646839599776e-10, 4.1557059898434011e-9, 5.7597296211570979e-9, 3.8122156554601661e-9, 1.4262424252974663e-9, 3.1407018265993646e-10, 4.0381750253734046e-11, 2.9114488590250768e-12, 1.0920116271998683e-13, 1.8788028835341908e-15, 1.1926088049071503e-17, 1.8768268183472803e-20], [-4.5254762517901321e-10, -1.0153313895137364e-10, 1.1947992720011323e-10, 9.3634850542844621e-11, 2.5739887852811658e-11, 2.3486338713306594e-12, -2.0017780711739174e-13, -5.3459430945370920e-14, -3.5555774677817855e-15, -9.0437917313119869e-17, -8.0271078595349053e-19, -1.8648024723501958e-21], [4.1714680762794446e-12, 1.3393198960545119e-12, -1.0057964584158421e-13, 2.2507949255828995e-13, 3.8651163476779524e-13, 1.7854530210427761e-13, 3.8237823909493918e-14, 4.1586556719587545e-15, 2.2640366653959465e-16, 5.6922302714925711e-18, 5.6439100820266232e-20, 1.7227467106267972e-22], [1.5622574774521122e-12, 9.5727741472785713e-14, -8.3490625675324402e-13, -6.5593102772004882e-13, -2.3883085679535018e-13, -4.8318193935858055e-14, -5.6750406624675410e-15, -3.9053709452975847e-16, -1.5593374632273124e-17, -3.4345999305217477e-19, -3.6235921029552462e-21, -1.4514908736654971e-23], [-1.4816449687889651e-14, -2.6427651122427255e-16, 8.4910909464103571e-15, 6.3483656540383654e-15, 2.2651413027392441e-15, 4.7521337362340425e-16, 6.5199302869041187e-17, 6.1635803798509479e-18, 3.7774002318044134e-19, 1.2761973422509367e-20, 1.9477015142452827e-22, 1.1245992248050263e-24], [-5.7703947640316649e-15, -4.3168308037332635e-16, 2.9276744395377539e-15, 2.2675417547948033e-15, 7.9192911178105104e-16, 1.4700162975879412e-16, 1.4448292713233999e-17, 6.6764961664517137e-19, 7.3825452406675551e-21, -3.6309329969473812e-22, -1.0180431065328084e-23, -8.2178054720976483e-26], [6.0112437289280041e-17, 1.4044863735858157e-18, -3.1822225388703393e-17, -2.1606858049087810e-17, -6.2189245880156367e-18, -7.7644186801424943e-19, -9.4582740746422635e-21, 7.3335276213788488e-21, 7.3608744629045407e-22, 3.0463085252926412e-23, 6.0058512724224582e-25, 5.6949394579582143e-27], [2.1116793005234891e-17, 1.6044737377906514e-18, -1.0744119031807487e-17, -8.3906154447995466e-18, -2.9750586612420044e-18, -5.7006858181799724e-19, -6.0461780934149158e-20, -3.4853072862059152e-21, -1.0830971840112039e-22, -2.0626527827701094e-24, -3.1967397535147886e-26, -3.6926565061816959e-28], [-2.3529314626954601e-19, -1.8320025635357230e-21, 1.2698216607520778e-19, 8.3989587914590807e-20, 2.3577982011246578e-20, 2.9553555267229005e-21, 1.0031509382103897e-22, -7.7797712610048553e-24, -3.5010610222375512e-25, 2.0789667687041731e-26, 1.2396174190407146e-27, 2.2439141849620337e-29], [-7.7248356285856977e-20, -6.0708449029703546e-21, 3.9201715794824481e-20, 3.0786046916370870e-20, 1.0974079574872613e-20, 2.1116007442666028e-21, 2.2317667021425015e-22, 1.2390884389468317e-23, 3.1879981041694689e-25, 2.1596338624372459e-27, -5.0361093323269753e-29, -1.3042457956134504e-30]],
        [[6.0375826712891485e-2, 4.0482458181146938e-2, 1.8080397877501151e-2, 5.3049826313592547e-3, 9.9989204169474267e-4, 1.1706819458261440e-4, 8.1059780261040970e-6, 3.0865177216957112e-7, 5.7781621817222517e-9, 4.4165599254698014e-11, 9.6937474664445455e-14, 2.5485705227216648e-17], [-1.1946456922378965e-3, -8.0890838421094133e-4, -3.6855626506668157e-4, -1.1152492269358300e-4, -2.1943376564374380e-5, -2.7200371040490441e-6, -2.0285586431477937e-7, -8.5059375795173832e-9, -1.8083223339659515e-10, -1.6457158715547605e-12, -4.6858137860083287e-15, -1.9854508104298972e-18], [1.5860115420155372e-5, 1.1965776161012645e-5, 6.5750112007424393e-6, 2.5036961432170390e-6, 6.2925088574352995e-7, 9.9575259869510141e-8, 9.4105017824586401e-9, 4.9560538889025050e-10, 1.3141724019493140e-11, 1.4893406684223180e-13, 5.3387650980855464e-16, 3.0085054380042117e-19], [-9.2385225791305750e-8, -1.8467843340022406e-7, -1.9635467000981918e-7, -1.1110284883464600e-7, -3.5728889463852574e-8, -6.6495125591294846e-9, -7.0426941770959483e-10, -4.0449281033964982e-11, -1.1540674899374146e-12, -1.4051353740400682e-14, -5.4988561329584384e-17, -3.6335677860673767e-20], [-4.9359546800035988e-9, 2.6085087278606293e-9, 6.7128244112940259e-9, 4.6218537644750954e-9, 1.6233158058348482e-9, 3.1990394552595496e-10, 3.5579222392487989e-11, 2.1504117120872213e-12, 6.5232456134703836e-14, 8.6261930127235471e-16, 3.8322638364473538e-18, 3.2425632723534704e-21], [-2.1787921335859443e-11, -4.9330609918068775e-11, -6.1704631446490940e-11, -4.2821210229942930e-11, -1.7411501962111997e-11, -4.1840614171371683e-12, -5.8189091900163138e-13, -4.4690112450740528e-14, -1.7496958584454861e-15, -3.0538844772044407e-17, -1.8675147788726218e-19, -2.4220897237724808e-22], [2.0998129074514141e-11, 2.2706681043861379e-12, -9.4477461363678931e-12, -7.2796083576839023e-12, -2.4481016027016440e-12, -4.2539363177380677e-13, -3.7477621977618092e-14, -1.4178600357038400e-15, -6.3166284261847878e-18, 6.4517562967381396e-19, 8.3507075270292117e-21, 1.7820502576367290e-23], [-5.7379223880832368e-13, -5.0553391640484229e-14, 2.7207708803801562e-13, 2.0513916936836507e-13, 6.7547757451516292e-14, 1.1253292465189983e-14, 8.8590807016964681e-16, 1.9803532588548742e-17, -1.0127800433540106e-18, -5.0129765787279393e-20, -5.5841405720844595e-22, -1.3668710412143539e-24], [-5.5432553520056069e-14, -4.1801426108891477e-15, 2.8503504965460149e-14, 2.2480693981522271e-14, 8.1078097161197444e-15, 1.5972392675206665e-15, 1.7694840163797958e-16, 1.0843316294858801e-17, 3.5249273519066217e-19, 5.6959395430385163e-21, 4.0737596192646159e-23, 9.8919958416130201e-26], [3.5692053841547457e-15, 2.5699757033026943e-16, -1.8270917942975777e-15, -1.4176141756111888e-15, -4.9965778622187242e-16, -9.5131159447148086e-17, -1.0018694809354911e-17, -5.7061753044203945e-19, -1.6873040753227672e-20, -2.5215455690210216e-22, -1.9050288099303602e-24, -6.2075969280258927e-27], [9.2284233623359811e-17, 8.5987340312499148e-18, -4.6130035190573653e-17, -3.7415030638633274e-17, -1.3796946860071196e-17, -2.7632272946030340e-18, -3.0534315650836997e-19, -1.7667217414433319e-20, -4.6244309018153338e-22, -3.0955318529707760e-24, 3.8423195392043298e-26, 3.5026021703095254e-28], [-1.5021168758220251e-17, -1.1591551608601632e-18, 7.6310072431164796e-18, 5.9711111689986056e-18, 2.1192732092951322e-18, 4.0536544651167729e-19, 4.2493969804092172e-20, 2.3363887505873106e-21, 6.0384223875075570e-23, 5.5112538075008762e-25, -6.6845239149435196e-28, -2.0351084086047289e-29], [1.0006108066834616e-19, 3.6036137060776443e-22, -5.4158688032930566e-20, -3.5363618037051927e-20, -9.6482287410643221e-21, -1.0915004276452234e-21, -2.8255714761464281e-24, 9.0884279884050226e-24, 6.6073797889943590e-25, 1.7587321302079836e-26, 2.0521902542710105e-28, 1.2710331042438853e-30], [4.9348802450449907e-20, 4.1440825602332366e-21, -2.4922974148847303e-20, -1.9827408655409308e-20, -7.1742499214545127e-21, -1.4088428957160805e-21, -1.5338990703632866e-22, -8.9551940186991755e-24, -2.6002344697228840e-25, -3.3473675885765655e-27, -1.8037383956173844e-29, -7.3000208867981646e-32]],
        [[5.8109026050239561e-2, 3.8953811483687892e-2, 1.7389611280239740e-2, 5.0985542734387101e-3, 9.5996553840854116e-4, 1.1222748980125656e-4, 7.7548805003704857e-6, 2.9442995621824369e-7, 5.4885256307536935e-9, 4.1669387321033712e-11, 9.0329373335686623e-14, 2.2987894652089444e-17], [-1.0734333962961573e-3, -7.2139606191261076e-4, -3.2371152687498278e-4, -9.5684433870615920e-5, -1.8225451294191161e-5, -2.1647543312798543e-6, -1.5282815725851357e-7, -5.9747787214748139e-9, -1.1604438142862951e-10, -9.3626617262892749e-13, -2.2431221464027406e-15, -7.0341194030042295e-19], [1.4331751765056709e-5, 9.9753677173062184e-6, 4.7923579723097918e-6, 1.5626512074324461e-6, 3.3705704017647033e-7, 4.6384436739572769e-8, 3.8735207876052534e-9, 1.8282386718159297e-10, 4.3862163360030983e-12, 4.5053411787249786e-14, 1.4422215295797147e-16, 6.7129405676726822e-20], [-1.5498351138780212e-7, -1.4851219552508742e-7, -1.0748923237448268e-7, -5.0699158325509862e-8, -1.4782326171469807e-8, -2.5861261710984395e-9, -2.6148240597777105e-10, -1.4403047619499942e-11, -3.9273133510549654e-13, -4.5074608905105683e-15, -1.6036144906381122e-17, -8.4903019398324725e-21], [-2.1609326174649487e-9, 2.0119852223891977e-9, 4.1013792143577019e-9, 2.7011225374256343e-9, 9.2041828157939697e-10, 1.7571844473181595e-10, 1.8799107520881728e-11, 1.0799862455182930e-12, 3.0550145137247476e-14, 3.6450627901698623e-16, 1.3662610730501507e-18, 8.0133035764917141e-22], [2.0648859079220982e-10, -1.8142463736098837e-11, -1.5397365637752667e-10, -1.1416533192219371e-10, -4.0778756111812872e-11, -8.0293376546830479e-12, -8.8331190764711546e-13, -5.2334962943342293e-14, -1.5390905826358584e-15, -1.9390598013853656e-17, -7.9262232942491385e-20, -5.5459482196016277e-23], [-1.4953801269901867e-12, 3.6616898414000448e-13, 1.5471391330945723e-12, 1.1958090528026248e-12, 4.6794835624147541e-13, 1.0387364820895037e-13, 1.3193125226686972e-14, 9.2371899960311104e-16, 3.2949207045963275e-17, 5.2094830081810755e-19, 2.8208920364370991e-21, 2.9442042272767386e-24], [-5.5037409606674507e-13, -4.8220818561658906e-14, 2.6741400945519218e-13, 2.0711809411034860e-13, 7.1701553145025570e-14, 1.3165784987709489e-14, 1.2919475150179037e-15, 6.3470959285407236e-17, 1.3193988059881605e-18, 6.3055757895773298e-21, -4.4792993689854591e-23, -1.4059418082525899e-25], [3.2141926435250317e-14, 2.5326584308623601e-15, -1.6148606430275503e-14, -1.2554337827190829e-14, -4.4016233430189648e-15, -8.2488632456860873e-16, -8.3554031243660911e-17, -4.3275173496150808e-18, -1.0008140803314194e-19, -7.1735790067697465e-22, 1.1492847980358579e-24, 8.3815792350236844e-27], [8.2297814766190140e-17, 8.7575338090301418e-18, -4.3298616235202956e-17, -3.8600179404057157e-17, -1.6193209181392216e-17, -3.8709157328729885e-18, -5.4390639406023058e-19, -4.3874164330045113e-20, -1.9025595345928574e-21, -3.9354618164289606e-23, -3.1358383986841259e-25, -6.3067064587899095e-28], [-1.0118849780032246e-16, -8.0482122389462195e-18, 5.1350244388849530e-17, 4.0463191234913756e-17, 1.4493986484934292e-17, 2.8118977301524044e-18, 3.0186056816518052e-19, 1.7362506989683679e-20, 4.9757529737127977e-22, 6.3128435434091626e-24, 2.9883633221328348e-26, 4.2406089272033904e-29], [4.6033649301089114e-18, 3.5227179751972536e-19, -2.3411723039503556e-18, -1.8303935990426900e-18, -6.4944879581724909e-19, -1.2434428968498375e-19, -1.3101354439022021e-20, -7.3376569389431706e-22, -2.0261985900305893e-23, -2.4605521706038320e-25, -1.1629260846307006e-27, -2.0776613508738817e-30], [8.4506687859385772e-20, 8.2147077114687748e-21, -4.2161806415998119e-20, -3.4595849313642071e-20, -1.2937239817454588e-20, -2.6428490961275278e-21, -3.0115481144926379e-22, -1.8421374506033524e-23, -5.4988287440815800e-25, -6.5106134889097218e-27, -1.4158534955724526e-29, 6.6896094651346656e-32], [-1.7781811692795732e-20, -1.4738684828110183e-21, 8.9891120791980898e-21, 7.1322413807947288e-21, 2.5726024879149022e-21, 5.0297191526926634e-22, 5.4393762971760623e-23, 3.1378123453844746e-24, 8.8628870123224937e-26, 1.0399136348535468e-27, 3.4425186141885038e-30, -1.6574158060309940e-33]],
        [[5.6070696825784483e-2, 3.7585547901813817e-2, 1.6777089250634155e-2, 4.9181747555983304e-3, 9.2578913267444469e-4, 1.0819728708687624e-4, 7.4730954785643964e-6, 2.8355669418570946e-7, 5.2811245441621217e-9, 4.0039392666108895e-11, 8.6584217611869586e-14, 2.1906347585623663e-17], [-9.6652319365162804e-4, -6.4820056692796533e-4, -2.8962887868670857e-4, -8.5038813854422170e-5, -1.6043920426905084e-5, -1.8809260061867254e-6, -1.3046858824242982e-7, -4.9796007574437166e-9, -9.3520136506761313e-11, -7.1802078238025088e-13, -1.5861200163623145e-15, -4.2039747842966071e-19], [1.2384854360362655e-5, 8.3750625884165278e-6, 3.8057245655371331e-6, 1.1468190056969428e-6, 2.2431092190701971e-7, 2.7580320039125510e-8, 2.0344261161563329e-9, 8.4029964117871147e-11, 1.7485580772690595e-12, 1.5400622888676995e-14, 4.1401800893810687e-17, 1.5252282751212834e-20], [-1.6178012364165417e-7, -1.1905204942614057e-7, -6.2909067502377501e-8, -2.2971080197083109e-8, -5.5524480221034361e-9, -8.4835396861208240e-10, -7.7598281197800191e-11, -3.9539941199921952e-12, -1.0098468183864261e-13, -1.0891400080734501e-15, -3.6031010042568755e-18, -1.6791677016331016e-21], [9.0370875329616489e-10, 1.6705829916453797e-9, 1.7274682682114997e-9, 9.6263436332960358e-10, 3.0533173226668589e-10, 5.5926575883207439e-11, 5.8033514151783366e-12, 3.2416565636405023e-13, 8.8862670639604715e-15, 1.0166529967982559e-16, 3.5587416952397997e-19, 1.7853369481889743e-22], [8.6373113540403078e-11, -1.7572878566073247e-11, -7.7559995612205647e-11, -5.5239010415216253e-11, -1.9283780629075320e-11, -3.7125395157866891e-12, -3.9756444837076100e-13, -2.2742168823894904e-14, -6.3708127421928321e-16, -7.4668421960961515e-18, -2.7041573577209059e-20, -1.4522471107542321e-23], [-5.4046851737115526e-12, -7.0655052020840557e-14, 3.2620849478154738e-12, 2.5016999498231425e-12, 8.9743461171955815e-13, 1.7583213840109514e-13, 1.9131032216985442e-14, 1.1140016921643332e-15, 3.1924608789606822e-17, 3.8650780249929927e-19, 1.4758939543963610e-21, 8.8640438750514641e-25], [1.1848422271026156e-13, 5.0994186713918997e-15, -6.7772466144002510e-14, -5.3652144957341465e-14, -1.9795308955782768e-14, -4.0114034801632801e-15, -4.5546832893458844e-16, -2.8020976137110267e-17, -8.6332640493709460e-19, -1.1540922330698143e-20, -5.0989623613878471e-23, -3.9492671132578623e-26], [6.1361697837277895e-15, 5.0806360350648003e-16, -3.0111402344758699e-15, -2.3173041154482115e-15, -7.9767896456210219e-16, -1.4543138452267951e-16, -1.4134950580774509e-17, -6.8512303702213440e-19, -1.3956291664059004e-20, -6.4205889312949485e-23, 4.4182064707162419e-25, 1.2051260367162972e-27], [-6.7306557969615118e-16, -5.2987836465452572e-17, 3.4013460397329522e-16, 2.6601719114744236e-16, 9.4178337840991516e-17, 1.7926899308449681e-17, 1.8638164854471189e-18, 1.0123874355532031e-19, 2.5936845636040644e-21, 2.5550173190203262e-23, 5.7279344896527930e-26, -2.6698922129197910e-29], [2.4791631114799439e-17, 1.9655532103480949e-18, -1.2553686118720927e-17, -9.8550809062514618e-18, -3.5064835776165934e-18, -6.7196573566870936e-19, -7.0492316282498058e-20, -3.8750773015278937e-21, -1.0087565609824124e-22, -1.0142354977951561e-24, -2.2910026620897968e-27, 1.5364879829468563e-30], [2.2270731462971190e-19, 1.8427096943275645e-20, -1.1290356693112041e-19, -8.9894740361077204e-20, -3.2663408665122616e-20, -6.4789759742581908e-21, -7.2057505967834729e-22, -4.3897361173816627e-23, -1.3821788024062651e-24, -2.0375475927779441e-26, -1.1824195992748062e-28, -1.8523533839024851e-31], [-7.4095800700284686e-20, -6.0160550478058404e-21, 3.7521978672951552e-20, 2.9657088366994300e-20, 1.0651823820647356e-20, 2.0713169352352547e-21, 2.2252245699689144e-22, 1.2746705799302953e-23, 3.5891674475724012e-25, 4.3046438956501643e-27, 1.7151847025290679e-29, 1.4979314662983973e-32], [3.7204118065714016e-21, 3.0106668113820887e-22, -1.8842643930893484e-21, -1.4881685162120544e-21, -5.3399805339736610e-22, -1.0370439044324193e-22, -1.1120555572229309e-23, -6.3534217221727251e-25, -1.7821708345265877e-26, -2.1260869339659022e-28, -8.4311579217415558e-31, -7.5725653811590528e-34]],
        [[5.4230816760330559e-2, 3.6351926247907296e-2, 1.6226155919461205e-2, 4.7565398777487971e-3, 8.9532824539350669e-4, 1.0463167025431138e-4, 7.2262888768491386e-6, 2.7416403119119443e-7, 5.1054481679453860e-9, 3.8698943666253616e-11, 8.3654019251594433e-14, 2.1147251847377212e-17], [-8.7487207039731225e-4, -5.8648716254798524e-4, -2.6182669837787457e-4, -7.6770640590446538e-5, -1.4455644137216062e-5, -1.6901527819153009e-6, -1.1680468385663260e-7, -4.4354972714879190e-9, -8.2701254926927316e-11, -6.2804980994673779e-13, -1.3618857188890259e-15, -3.4656322615437478e-19], [1.0567975564085049e-5, 7.0950908797872905e-6, 3.1772567950627172e-6, 9.3612447916178509e-7, 1.7748581903593537e-7, 2.0947410813429967e-8, 1.4660788890346407e-9, 5.6634746950276012e-11, 1.0814217106610845e-12, 8.5031955826165586e-15, 1.9497414992610233e-17, 5.5420498000244660e-21], [-1.3924298904899315e-7, -9.5162305164141627e-8, -4.4154706855697981e-8, -1.3719147168668712e-8, -2.7917676997568465e-9, -3.6003729826282200e-10, -2.8056179952990008e-11, -1.2319177994489070e-12, -2.7399253373681961e-14, -2.5911304398592172e-16, -7.5037804128417621e-19, -2.9710780058061228e-22], [1.6464925359221505e-9, 1.3176569901837968e-9, 7.8501754954728528e-10, 3.2125691682031225e-10, 8.5126325061414608e-11, 1.3937228397491559e-11, 1.3408225311014741e-12, 7.0833239938882993e-14, 1.8545442371577110e-15, 2.0302450192988319e-17, 6.7400326539795463e-20, 3.0773297025030995e-23], [2.7928362863653774e-12, -1.6963408922745339e-11, -2.4918280473117796e-11, -1.5349192722630745e-11, -5.0713042723761381e-12, -9.4699432307897394e-13, -9.9173073561169821e-14, -5.5570821575447381e-15, -1.5208317049400548e-16, -1.7275562845845155e-18, -5.9473698647625767e-21, -2.8536844249245799e-24], [-1.7076735162550732e-12, 1.1390777377529131e-13, 1.2115746607793582e-12, 8.9478167863595032e-13, 3.1532947796438338e-13, 6.0826639419896214e-14, 6.5017431994779460e-15, 3.7009291698085244e-16, 1.0278472865729066e-17, 1.1873522872719413e-19, 4.1869338763859254e-22, 2.1068755370141183e-25], [9.9069173991129310e-14, 4.4604928084969443e-15, -5.5271063367885523e-14, -4.2929018199723555e-14, -1.5399438169713201e-14, -3.0039341757371439e-15, -3.2431799616747630e-16, -1.8667368339831784e-17, -5.2586137276714140e-19, -6.1992655399288696e-21, -2.2599851695868728e-23, -1.2203876653160663e-26], [-3.2290359297774024e-15, -2.2260401371053755e-16, 1.7055945548145795e-15, 1.3504574557065805e-15, 4.9034360080916745e-16, 9.6903671187174993e-17, 1.0632766845432050e-17, 6.2515785335702706e-19, 1.8131813176621158e-20, 2.2300180186682902e-22, 8.7007211823706289e-25, 5.3738567967192329e-28], [1.0055919150995506e-17, 9.4651160215478794e-19, -5.8261563835428084e-18, -5.3456000377770796e-18, -2.2955385549205593e-18, -5.4775915384500182e-19, -7.3865198508573518e-20, -5.4276650940246415e-21, -2.0055946260397914e-22, -3.2282478611003215e-24, -1.7253935064199749e-26, -1.6167547159976811e-29], [6.0500588152847357e-18, 4.6533359004913503e-19, -3.0636118727127886e-18, -2.3866423782886328e-18, -8.4122947332354225e-19, -1.5919371031865516e-19, -1.6419021906312978e-20, -8.8189089253142448e-22, -2.2225359281999529e-23, -2.1334834781985324e-25, -4.5674956103014577e-28, 1.8662945841340482e-31], [-4.0413566469232255e-19, -3.2105978689374242e-20, 2.0480070235914423e-19, 1.6101030265377488e-19, 5.7421197155395411e-20, 1.1046381212993885e-20, 1.1665590539192988e-21, 6.4922066934313732e-23, 1.7336077331666682e-24, 1.8590937345145300e-26, 5.4778920541124083e-29, 9.6470883995146992e-33], [1.2859691055862969e-20, 1.0467647835325875e-21, -6.5084739746506562e-21, -5.1431580268065823e-21, -1.8452795131333834e-21, -3.5784025816929349e-22, -3.8202466184742493e-23, -2.1581950494438250e-24, -5.8880701935785663e-26, -6.5245070126258084e-28, -2.0337646313623544e-30, -4.1015891740663408e-34], [1.4678943652764169e-23, 4.4635254487845519e-25, -7.8012211471066153e-24, -5.4930719295346431e-24, -1.7126546411778527e-24, -2.7131262661562510e-25, -2.1300747873469317e-26, -7.3742531064843310e-28, -1.0365465295950427e-29, -2.2170096932120416e-31, -5.0976660408667340e-33, -2.1405095459625831e-35]],
        [[5.2560637379037898e-2, 3.5232333178744278e-2, 1.5726373578767142e-2, 4.6100163036322020e-3, 8.6774333051742095e-4, 1.0140724187481652e-4, 7.0035269748762152e-6, 2.6570886124540815e-7, 4.9479018472722773e-9, 3.7503676964430901e-11, 8.1066398156750258e-14, 2.0491064942753295e-17], [-7.9657042692597154e-4, -5.3396048677495985e-4, -2.3834434433917198e-4, -6.9870225825465050e-5, -1.3152251437825890e-5, -1.5371065497120814e-6, -1.0616642604734273e-7, -4.0283260352898440e-9, -7.5025175484156786e-11, -5.6879929327889352e-13, -1.2299500481347385e-15, -3.1112718900130485e-19], [9.0518561419139945e-6, 6.0690073345804477e-6, 2.7102462378524785e-6, 7.9506549908191603e-7, 1.4981261857167697e-7, 1.7532799792569203e-8, 1.2132338823324226e-9, 4.6151475248574975e-11, 8.6260615724254649e-13, 6.5742040923702509e-15, 1.4337850244959778e-17, 3.6904302176986412e-21], [-1.1393086312130215e-7, -7.6616195571482452e-8, -3.4424649078963234e-8, -1.0195475710222862e-8, -1.9471387422994379e-9, -2.3204963780681140e-10, -1.6448249737688230e-11, -6.4597928228016756e-13, -1.2605522369306626e-14, -1.0206503341245651e-16, -2.4398655634829128e-19, -7.4074652782738342e-23], [1.4621344646758521e-9, 1.0121090378574253e-9, 4.8117196712641998e-10, 1.5462461597640028e-10, 3.2761875959532183e-11, 4.4168183941508974e-12, 3.6036467524678297e-13, 1.6559591919620023e-14, 3.8463307676015879e-16, 3.7848429745594787e-18, 1.1336722535864091e-20, 4.5799057068921140e-24], [-1.5247827966307984e-11, -1.3428991618489785e-11, -8.9429287140065368e-12, -3.9844340100200857e-12, -1.1178291749925683e-12, -1.8994622193806241e-13, -1.8716897127242108e-14, -1.0037007565751157e-15, -2.6495777998742638e-17, -2.9065350221432289e-19, -9.5914574235071802e-22, -4.2730437121335084e-25], [-1.4457002834169685e-13, 1.5783937206134425e-13, 3.0480867269132483e-13, 1.9783345458914141e-13, 6.6581945404511604e-14, 1.2527297196373446e-14, 1.3150799978056741e-15, 7.3622640598081682e-17, 2.0068755914003852e-18, 2.2614593416938308e-20, 7.6654278508969745e-23, 3.5436602116778428e-26], [2.3415862231938514e-14, -4.8242202497425150e-16, -1.5115402591316608e-14, -1.1341440838576712e-14, -4.0094202187471422e-15, -7.7298519694826445e-16, -8.2399314096954800e-17, -4.6678524178834553e-18, -1.2866307540791125e-19, -1.4684313606820224e-21, -5.0680493548104121e-24, -2.4259892487910208e-27], [-1.3224563247403878e-15, -7.4755890070933308e-17, 7.1539150337901885e-16, 5.5793441125076287e-16, 1.9986897714668729e-16, 3.8848051347408126e-17, 4.1707585029854352e-18, 2.3811880844548980e-19, 6.6283586152633905e-21, 7.6711457120189186e-23, 2.7081130930640402e-25, 1.3588857133404434e-28], [5.1007346600885513e-17, 3.7887371179379951e-18, -2.6431476755221675e-17, -2.0889846511750593e-17, -7.5369865065893803e-18, -1.4753214620791173e-18, -1.5974604386856533e-19, -9.2222676255018996e-21, -2.6068084140101275e-22, -3.0857873482392539e-24, -1.1303840160863114e-26, -6.1190081419237102e-30], [-1.1420078810784208e-18, -9.4307384699705105e-20, 5.8390088992526034e-19, 4.6781763946966277e-19, 1.7109756149028978e-19, 3.4069118579128938e-20, 3.7720394158280235e-21, 2.2427379628434189e-22, 6.5976390873660959e-24, 8.2638372030602609e-26, 3.3012507154326168e-28, 2.0944591311418979e-31], [-1.3126444572066638e-20, -7.7262515405221163e-22, 6.6910778381576004e-21, 4.9362051674170357e-21, 1.6183171995483929e-21, 2.7380199124890807e-22, 2.3341250529611962e-23, 8.4721905419232572e-25, 3.8741554995069630e-27, -3.1238132260381040e-28, -3.3589461977210705e-30, -4.4246355539244254e-33], [2.7550279564245577e-21, 2.1271240594441508e-22, -1.3989062935686581e-21, -1.0938910474004197e-21, -3.8767834632079264e-22, -7.3950443913080310e-23, -7.7180428244671127e-24, -4.2231207813735992e-25, -1.0990037108417175e-26, -1.1283242838227303e-28, -3.0291365352105979e-31, -2.4596001925326985e-35], [-1.4832143569236787e-22, -1.1878343612982393e-23, 7.5168586108783810e-23, 5.9225677941892857e-23, 2.1180449993906415e-23, 4.0904166149410626e-24, 4.3437979700361324e-25, 2.4376289617758448e-26, 6.5972941819022341e-28, 7.2551521484903298e-30, 2.2808079115174242e-32, 6.9761821919062792e-36]],
        [[5.1035847187001563e-2, 3.4210234536930904e-2, 1.5270143430874883e-2, 4.4762754441602511e-3, 8.4256877300856765e-4, 9.8465180556778538e-5, 6.8003305743899907e-6, 2.5799933635635647e-7, 4.8043284849535370e-9, 3.6415317120661505e-11, 7.8713442214720586e-14, 1.9896106496082485e-17], [-7.2925013688724831e-4, -4.8882982440249160e-4, -2.1819544936127833e-4, -6.3961822711095958e-5, -1.2039583364362058e-5, -1.4069919188151108e-6, -9.7172358173524946e-8, -3.6866884596949322e-9, -6.8652705199300452e-11, -5.2037855938382219e-13, -1.1248656810166355e-15, -2.8434916054380679e-19], [7.8148195843114098e-6, 5.2385577891231467e-6, 2.3384256321347496e-6, 6.8554518395007901e-7, 1.2905650391220281e-7, 1.5084559907540117e-8, 1.0420332557249098e-9, 3.9546478229451115e-11, 7.3673815596731847e-13, 5.5878366507021735e-15, 1.2090821891487479e-17, 3.0623613994923521e-21], [-9.3009377157703755e-8, -6.2373361778172741e-8, -2.7866324143750508e-8, -8.1803205359395909e-9, -1.5428944829072878e-9, -1.8080494456333291e-10, -1.2533373531110891e-11, -4.7789871136921693e-13, -8.9613155022384130e-15, -6.8615474758308824e-17, -1.5073254643299356e-19, -3.9323646518884337e-23], [1.1569255891699421e-9, 7.7936100281432176e-10, 3.5141144204655022e-10, 1.0464022185655339e-10, 2.0133430362890963e-11, 2.4228046745965678e-12, 1.7386357658383116e-13, 6.9343959803249641e-15, 1.3794991004845198e-16, 1.1443877246099137e-18, 2.8221367278942908e-21, 8.9279021328994333e-25], [-1.4248425483530218e-11, -9.9726346755255764e-12, -4.8383900998324953e-12, -1.5967191922773480e-12, -3.4851175451762531e-13, -4.8419999449237911e-14, -4.0647297750819622e-15, -1.9162712600140394e-16, -4.5492061238226591e-18, -4.5540964964193590e-20, -1.3788361683092076e-22, -5.5568992245284796e-26], [1.3288630425661933e-13, 1.2634896240073213e-13, 9.0626701768012052e-14, 4.2362929158102624e-14, 1.2227699344424081e-14, 2.1126923692039352e-15, 2.1016616452457231e-16, 1.1323196568187317e-17, 2.9916593325748858e-19, 3.2714762294971440e-21, 1.0697352574466416e-23, 4.6529597236869196e-27], [1.9947025084343295e-15, -1.3758916395394271e-15, -3.1074452499526017e-15, -2.0630424266262473e-15, -6.9916274730147138e-16, -1.3180138393359622e-16, -1.3827546209200699e-17, -7.7211606039714202e-19, -2.0947381907665966e-20, -2.3417860657217037e-22, -7.8265682433843103e-25, -3.5062784300902630e-28], [-2.4312782755504616e-16, 9.9558092461907249e-19, 1.5127365935458213e-16, 1.1415106184536628e-16, 4.0364159855879221e-17, 7.7693387600647502e-18, 8.2573651900304320e-19, 4.6566203111978092e-20, 1.2749497024557781e-21, 1.4400641783557327e-23, 4.8820019492306875e-26, 2.2459803164208377e-29], [1.3446717179387201e-17, 8.1390959181363802e-19, -7.1883305094057330e-18, -5.6094573051200610e-18, -2.0058734365959837e-18, -3.8867157718526947e-19, -4.1541502001561632e-20, -2.3567274604915170e-21, -6.5004893761189220e-23, -7.4184316632828424e-25, -2.5566085340550323e-27, -1.2160710099921469e-30], [-5.5725532175013093e-19, -4.2034876517443804e-20, 2.8707696916973406e-19, 2.2642505981453429e-19, 8.1384687682110967e-20, 1.5844529822181149e-20, 1.7028601477765065e-21, 9.7295937620996542e-23, 2.7099511596148712e-24, 3.1371289537875944e-26, 1.1066761502875226e-28, 5.5213016529322781e-32], [1.7088613957381263e-20, 1.3859760857476654e-21, -8.7008249175087601e-21, -6.9100207557253959e-21, -2.4982517436959650e-21, -4.8983565341842778e-22, -5.3131561753129101e-23, -3.0734880572415046e-24, -8.7082092368156250e-26, -1.0336142701976276e-27, -3.7957714671615159e-30, -2.0500213701440333e-33], [-2.8672819441300323e-22, -2.5360610149818406e-23, 1.4487989963407662e-22, 1.1696468731499229e-22, 4.3054905563689207e-23, 8.6378434175438307e-24, 9.6518510616456157e-25, 5.8037541391633966e-26, 1.7310393583733067e-27, 2.2047110992678094e-29, 8.9797261099057175e-32, 5.7890488416700681e-35], [-6.2762498807944427e-24, -4.0709753024888478e-25, 3.2167014769697332e-24, 2.4371558146178209e-24, 8.3068667711289126e-25, 1.4978040182328808e-25, 1.4343589655608482e-26, 6.8016605890988713e-28, 1.3340994235188598e-29, 5.4317900832932667e-32, -4.2570464388644635e-34, -9.2306124379210222e-37]],
        [[4.9636539704066550e-2, 3.3272253442668890e-2, 1.4851464052597916e-2, 4.3535439796556586e-3, 8.1946699477252901e-4, 9.5765427697174571e-5, 6.6138759886316930e-6, 2.5092535435330979e-7, 4.6725995257879335e-9, 3.5416841854613224e-11, 7.6555153716761941e-14, 1.9350545925105025e-17], [-6.7090183231770082e-4, -4.4971744909200871e-4, -2.0073674603704752e-4, -5.8843796658837844e-5, -1.1076164898172426e-5, -1.2943954145697697e-6, -8.9395285961821108e-8, -3.3915919573456652e-9, -6.3156531493864000e-11, -4.7870778522170027e-13, -1.0347527142775207e-15, -2.6155207157520357e-19], [6.8009530201040612e-6, 4.5588127956522775e-6, 2.0348922077454695e-6, 5.9651194345964296e-7, 1.1228285494487761e-7, 1.3121956270825039e-8, 9.0626750944653013e-10, 3.4384213101472639e-11, 6.4031346932106978e-13, 4.8536904954825052e-15, 1.0492548866234382e-17, 2.6526764792673124e-21], [-7.6597384074837513e-8, -5.1347228447102924e-8, -2.2921863198950404e-8, -6.7204047144852703e-9, -1.2652781328513882e-9, -1.4791160542223251e-10, -1.0219652057854369e-11, -3.8795050644157757e-13, -7.2299935252780386e-15, -5.4864591497483699e-17, -1.1880977136118244e-19, -3.0137069551221425e-23], [9.0527164297040692e-10, 6.0721110237313781e-10, 2.7139451394917395e-10, 7.9721180220242199e-11, 1.5050034462404678e-11, 1.7658275885752800e-12, 1.2260758798842671e-13, 4.6852019385214483e-15, 8.8111987195427629e-17, 6.7742286924378420e-19, 1.4972574349502359e-21, 3.9474390717877511e-25], [-1.0942927438074136e-11, -7.3809420945927896e-12, -3.3364633189819542e-12, -9.9731789616690622e-13, -1.9288908339491544e-13, -2.3366102993494500e-14, -1.6905231409281346e-15, -6.8090700240676110e-17, -1.3704241364983085e-18, -1.1524200664760133e-20, -2.8863497952932745e-23, -9.2774614738809125e-27], [1.2917517892531248e-13, 9.0943738684263225e-14, 4.4587927051861089e-14, 1.4909292401066466e-14, 3.2997684263953375e-15, 4.6453383757713115e-16, 3.9448554363404064e-17, 1.8771454200325581e-18, 4.4860518978666873e-20, 4.5059302604930097e-22, 1.3621087771822294e-24, 5.4215542333822673e-28], [-1.1275987583335583e-15, -1.1024014493846506e-15, -8.1005811238427945e-16, -3.8399795435094111e-16, -1.1165509769363450e-16, -1.9358439785702802e-17, -1.9275659110057276e-18, -1.0374766982765223e-19, -2.7329255505240245e-21, -2.9718523341740431e-23, -9.6187324466543366e-26, -4.0918632926805499e-29], [-1.7810559208995844e-17, 1.1420065210645666e-17, 2.6544789208213197e-17, 1.7675861089067502e-17, 5.9901913771142470e-18, 1.1277777345449596e-18, 1.1804787012705581e-19, 6.5692426301460410e-21, 1.7733573918580715e-22, 1.9675357374408192e-24, 6.4928634038478816e-27, 2.8321218018847358e-30], [1.9984754782865612e-18, -4.2720764972816536e-21, -1.2367626116744901e-18, -9.3298620736614121e-19, -3.2944745663588033e-19, -6.3275928517793651e-20, -6.7047134185779318e-21, -3.7651127628230424e-22, -1.0246823685286995e-23, -1.1469494749311054e-25, -3.8297042011373559e-28, -1.7058760551562865e-31], [-1.0835398245337737e-19, -6.6041032843073462e-21, 5.7780195296146388e-20, 4.5036816728269679e-20, 1.6073111906223580e-20, 3.1058260834411205e-21, 3.3069245594442958e-22, 1.8662363174245074e-23, 5.1091538006450486e-25, 5.7650205847515160e-27, 1.9492757379701960e-29, 8.9001905637135105e-33], [4.6117659308523991e-21, 3.4682642060110571e-22, -2.3725949783976671e-21, -1.8674752275472393e-21, -6.6933974234441724e-22, -1.2980922791061984e-22, -1.3877802932121797e-23, -7.8720639349467599e-25, -2.1700989685197023e-26, -2.4734300547626933e-28, -8.5001748539011008e-31, -4.0098844689660694e-34], [-1.5890727491652993e-22, -1.2709699131008284e-23, 8.0876252430316099e-23, 6.3971211835309376e-23, 2.3012255098549377e-23, 4.4817982563711629e-24, 4.8174750287860362e-25, 2.7524988306546677e-26, 7.6642672927659857e-28, 8.8648578423657386e-30, 3.1197229352297822e-32, 1.5430663289321832e-35], [4.1401823655267267e-24, 3.4448118877209933e-25, -2.0969020997414967e-24, -1.6681267369685972e-24, -6.0361588378582392e-25, -1.1844474316722423e-25, -1.2858194675769760e-26, -7.4446935809636515e-28, -2.1111648585525543e-29, -2.5071790952617259e-31, -9.1984544881269706e-34, -4.9258735778666507e-37]],
        [[4.8346396465639050e-2, 3.2407447496275356e-2, 1.4465447649902038e-2, 4.2403874842980469e-3, 7.9816755868765461e-4, 9.3276309558776372e-5, 6.4419692257497971e-6, 2.4440334116216748e-7, 4.5511499567495372e-9, 3.4496291251917589e-11, 7.4565337720866441e-14, 1.8847586525442064e-17], [-6.1994024334651688e-4, -4.1555694996338119e-4, -1.8548876489220929e-4, -5.4374000546664339e-5, -1.0234811110094761e-5, -1.1960714871892367e-6, -8.2604642938366653e-8, -3.1339566972390525e-9, -5.8358894031611890e-11, -4.4234221818536430e-13, -9.5614353940710985e-16, -2.4168075689740018e-19], [5.9619830597732815e-6, 3.9964241264641763e-6, 1.7838521855027528e-6, 5.2291717630882887e-7, 9.8428749727612515e-8, 1.1502704809553387e-8, 7.9441645449612046e-10, 3.0139636967251480e-11, 5.6124668793713617e-13, 4.2540988144445555e-15, 9.1955150756853325e-18, 2.3243528238560727e-21], [-6.3706733659406630e-8, -4.2703977807568143e-8, -1.9061630476357645e-8, -5.5878019867632214e-9, -1.0518162474593385e-9, -1.2292244638929943e-10, -8.4897959677315111e-12, -3.2211498375935886e-13, -5.9987317689989093e-15, -4.5473681219962038e-17, -9.8310880570860252e-20, -2.4857881786654819e-23], [7.1472361665157750e-10, 4.7912658221338083e-10, 2.1389554179213730e-10, 6.2715690256772303e-11, 1.1808852173713502e-11, 1.3806360249293547e-12, 9.5408368432334538e-14, 3.6226326640270044e-15, 6.7533303544596140e-17, 5.1269367587008025e-19, 1.1109606848628157e-21, 2.8212647765889584e-25], [-8.2416732764692433e-12, -5.5287947856769657e-12, -2.4717388900249918e-12, -7.2635193585177610e-13, -1.3719916587563567e-13, -1.6109548747963670e-14, -1.1196229550457574e-15, -4.2837843373298220e-17, -8.0695220555101541e-19, -6.2176725692896778e-21, -1.3784661482050390e-23, -3.6509313998832938e-27], [9.6233379774928909e-14, 6.4936022421554517e-14, 2.9377996689550913e-14, 8.7924204963301144e-15, 1.7033056888360665e-15, 2.0674818258698442e-16, 1.4992978607581292e-17, 6.0543911747073215e-19, 1.2217587240593152e-20, 1.0298201542970059e-22, 2.5821284481292610e-25, 8.2696743112645521e-29], [-1.0929491657535666e-15, -7.6903975589334707e-16, -3.7664216812796470e-16, -1.2575339150550711e-16, -2.7780265277115390e-17, -3.9021021823326888e-18, -3.3047914242780097e-19, -1.5673507291131731e-20, -3.7295718371990581e-22, -3.7236892716530589e-24, -1.1152065353375514e-26, -4.3596176189317472e-30], [9.4085105645663278e-18, 8.9518828008533965e-18, 6.4210403749089298e-18, 2.9983731117994658e-18, 8.6368384954957668e-19, 1.4876314786653159e-19, 1.4733899877670100e-20, 7.8900310968950413e-22, 2.0667132673713391e-23, 2.2312786153689095e-25, 7.1446821072128965e-28, 2.9776666066813878e-31], [1.1310267126748451e-19, -9.0500600045967569e-20, -1.9296904715312231e-19, -1.2684959769171121e-19, -4.2751113174062797e-20, -8.0182533621208813e-21, -8.3632227585801138e-22, -4.6354428354973253e-23, -1.2449573799111899e-24, -1.3713775611577448e-26, -4.4740197293758836e-29, -1.9072805718611790e-32], [-1.3369509103481984e-20, 1.5155514576761977e-22, 8.4334311003055237e-21, 6.3301879672845020e-21, 2.2293051801039471e-21, 4.2707818930401895e-22, 4.5115344091662528e-23, 2.5235039955204365e-24, 6.8305297587740567e-26, 7.5847488533949484e-28, 2.4997228254941982e-30, 1.0840742693943353e-33], [7.1345287363660703e-22, 4.2019539637552373e-23, -3.8198982360864273e-22, -2.9703320464523765e-22, -1.0578745275463363e-22, -2.0389394567230334e-23, -2.1637099229294357e-24, -1.2155575885579280e-25, -3.3067279285491766e-27, -3.6960990324326045e-29, -1.2303511775654855e-31, -5.4384060690927485e-35], [-3.0501384856732020e-23, -2.2648481564897260e-24, 1.5707362048332992e-23, 1.2337454764494436e-23, 4.4116040929922134e-24, 8.5293440534874721e-25, 9.0809773058324707e-26, 5.1220426452829209e-27, 1.4007676317051244e-28, 1.5776214897133626e-30, 5.3152758249958840e-33, 2.4058152080511111e-36], [1.1015729467500318e-24, 8.6954693685319539e-26, -5.6099973225539588e-25, -4.4250483883538478e-25, -1.5866264520903807e-25, -3.0767311832110460e-26, -3.2879929377926960e-27, -1.8637484609746620e-28, -5.1317560424080190e-30, -5.8373034223707107e-32, -1.9982820242293556e-34, -9.3336180758761369e-38]],
        [[4.7151920439859908e-2, 3.1606769016324986e-2, 1.4108055333688245e-2, 4.1356218414260408e-3, 7.7844753566951551e-4, 9.0971767119092244e-5, 6.2828099280494363e-6, 2.3836495998842582e-7, 4.4387064050859255e-9, 3.3644004281529298e-11, 7.2723079580873379e-14, 1.8381926094783543e-17], [-5.7511965840261369e-4, -3.8551291320001062e-4, -1.7207825057145720e-4, -5.0442853827111478e-5, -9.4948515302345164e-6, -1.1095974822949047e-6, -7.6632457910285712e-8, -2.9073763334184344e-9, -5.4139627220666263e-11, -4.1036142251236928e-13, -8.8701531324254597e-16, -2.2420737166638129e-19], [5.2610558023257580e-6, 3.5265791452319396e-6, 1.5741304020731218e-6, 4.6143911319148728e-7, 8.6856630259577188e-8, 1.0150333669183865e-8, 7.0101561038252628e-10, 2.6595997762558254e-11, 4.9525678953762990e-13, 3.7538931048654567e-15, 8.1142203028650066e-18, 2.0510021323930185e-21], [-5.3474106562699716e-8, -3.5844659591301946e-8, -1.5999703500577899e-8, -4.6901449022884570e-9, -8.8282723312099218e-10, -1.0317019891235107e-10, -7.1253014193195838e-12, -2.7032983494860466e-13, -5.0339748500787843e-15, -3.8156333305925484e-17, -8.2477950277425411e-20, -2.0848207688379593e-23], [5.7068948771755129e-10, 3.8254602689033477e-10, 1.7075644750641378e-10, 5.0056527904238657e-11, 9.4224387870564021e-12, 1.1011834574501947e-12, 7.6055810844075252e-14, 2.8857247042080721e-15, 5.3742180510051996e-17, 4.0741077258660262e-19, 8.8084343918005053e-22, 2.2274309618570311e-25], [-6.2640657475385791e-12, -4.1992641568701137e-12, -1.8747111594506393e-12, -5.4969768251343505e-13, -1.0350861700034353e-13, -1.2102532461463846e-14, -8.3641244529979782e-16, -3.1761901402250428e-17, -5.9219342081672388e-19, -4.4966491704221921e-21, -9.7465372829185259e-24, -2.4761718698603287e-27], [6.9980009472660650e-14, 4.6945718890277097e-14, 2.0988521930256852e-14, 6.1680326495502687e-15, 1.1651378804872470e-15, 1.3681706845778901e-16, 9.5095937716559688e-18, 3.6387126098005100e-19, 6.8546023424584100e-21, 5.2811694139098392e-23, 1.1703861009431058e-25, 3.0949484760511954e-29], [-7.8773086178066221e-16, -5.3131898342293409e-16, -2.4017130183105713e-16, -7.1785390101108562e-17, -1.3881214246017880e-17, -1.6808520553797715e-18, -1.2151298280182968e-19, -4.8872291701630475e-21, -9.8107454769920670e-23, -8.2110031720081901e-25, -2.0375647285442716e-27, -6.4088436932891690e-31], [8.6445634000200726e-18, 6.0472032794092195e-18, 2.9305651216466466e-18, 9.6530325901750996e-19, 2.1010310915657680e-19, 2.9073639072964859e-20, 2.4270472522600472e-21, 1.1353334333578805e-22, 2.6656913854726787e-24, 2.6252472623864075e-26, 7.7400030342071853e-29, 2.9582182577625042e-32], [-7.5918493798540406e-20, -6.7812109661161813e-20, -4.5772930455546539e-20, -2.0543873173233842e-20, -5.7743229184250414e-21, -9.7882037751238460e-22, -9.5847866602596797e-23, -5.0862934156619033e-24, -1.3213145091376657e-25, -1.4139747987735820e-27, -4.4764001053452217e-30, -1.8298976527837888e-33], [-4.7522079165761838e-22, 6.7952635883087126e-22, 1.2181859129151225e-21, 7.7794935486937056e-22, 2.5921976746504028e-22, 4.8301637232533283e-23, 5.0130226146588400e-24, 2.7654653611523471e-25, 7.3877880731582583e-27, 8.0816317666872581e-29, 2.6091018028373604e-31, 1.0902891903552542e-34], [7.4025043074818562e-23, -2.5176168131116887e-24, -4.8941972842382596e-23, -3.6364959693028429e-23, -1.2754149019207140e-23, -2.4358564468569489e-24, -2.5650567279915763e-25, -1.4293223012985192e-26, -3.8495697303605468e-28, -4.2442613670285456e-30, -1.3829821743267822e-32, -5.8642678922260593e-36], [-3.9276045097831528e-24, -2.1300536200699618e-25, 2.1256150237527264e-24, 1.6467724131322832e-24, 5.8515489132825753e-25, 1.1250805126494652e-25, 1.1903206179742904e-26, 6.6604916179618897e-28, 1.8019156870208640e-29, 1.9978757825181134e-31, 6.5638510436574584e-34, 2.8258113800109390e-37], [1.6668136480574028e-25, 1.2103725301036987e-26, -8.6094557084291527e-26, -6.7471712555686739e-26, -2.4075711491220903e-26, -4.6425522983460259e-27, -4.9257096412714710e-28, -2.7653113667258783e-29, -7.5131338557503667e-31, -8.3801208739504677e-33, -2.7790489647505738e-35, -1.2180437120781705e-38]],
        [[4.6041841201219730e-2, 3.0862663203284841e-2, 1.3775914899306552e-2, 4.0382585122084680e-3, 7.6012084945508519e-4, 8.8830054342311066e-5, 6.1348961878475600e-6, 2.3275322681894803e-7, 4.3342076731187961e-9, 3.2851936619249744e-11, 7.1010988485674064e-14, 1.7949167572315525e-17], [-5.3545170512858839e-4, -3.5892277994596710e-4, -1.6020942975199081e-4, -4.6963638949311286e-5, -8.8399593614807983e-6, -1.0330647702233846e-6, -7.1346856308042694e-8, -2.7068446683988128e-9, -5.0405431966873976e-11, -3.8205738687769344e-13, -8.2583480702175768e-16, -2.0874300852320456e-19], [4.6702948185168757e-6, 3.1305815000235956e-6, 1.3973720996533835e-6, 4.0962432247357671e-7, 7.7103530995517535e-8, 9.0105552619426113e-9, 6.2229863868364541e-10, 2.3609530531773821e-11, 4.3964422028504419e-13, 3.3323656018528684e-15, 7.2030635671018092e-18, 1.8206901460574400e-21], [-4.5261040864109823e-8, -3.0339280063640855e-8, -1.3542297722020253e-8, -3.9697766902834204e-9, -7.4723065666923911e-10, -8.7323687573410385e-11, -6.0308634339782861e-12, -2.2880640007174695e-13, -4.2607143582487854e-15, -3.2294905968146925e-17, -6.9807024784760108e-20, -1.7644884267565923e-23], [4.6056752620996621e-10, 3.0872678180065706e-10, 1.3780403100784652e-10, 4.0395823680579777e-11, 7.6037221574203194e-12, 8.8859773575045669e-13, 6.1369802436640508e-14, 2.3283388686548878e-15, 4.3357498674093651e-17, 3.2864055263767331e-19, 7.1038594076722417e-22, 1.7956785763940735e-25], [-4.8205098651153138e-12, -3.2312991922868602e-12, -1.4423522883954524e-12, -4.2282059971479152e-13, -7.9590345122485287e-14, -9.3016273225557769e-15, -6.4244286914266925e-16, -2.4375902516618092e-17, -4.5396869278677600e-19, -3.4415138954910558e-21, -7.4408848984424441e-24, -1.8816689299755565e-27], [5.1384089751770369e-14, 3.4446497768808051e-14, 1.5378189742990527e-14, 4.5091329816081324e-15, 8.4906902168762638e-16, 9.9274736188291998e-17, 6.8608335836148747e-18, 2.6052741051930131e-19, 4.8573023787261494e-21, 3.6880249271658793e-23, 7.9928725910939537e-26, 2.0300290633814415e-29], [-5.5449573499760844e-16, -3.7195102280548096e-16, -1.6626498467659552e-16, -4.8848840844702840e-17, -9.2241420517381145e-18, -1.0826075450749779e-18, -7.5196507983188909e-20, -2.8746237491215995e-21, -5.4081929583134331e-23, -4.1588259607194187e-25, -9.1881845895261136e-28, -2.4149271208615512e-31], [6.0147609824921995e-18, 4.0528779896699226e-18, 1.8283324559459270e-18, 5.4479611969082868e-19, 1.0490445051274497e-19, 1.2633323045541461e-20, 9.0699964568656852e-22, 3.6165603706489936e-23, 7.1818162872435535e-25, 5.9280817084854825e-27, 1.4438739256085895e-29, 4.4132674395447164e-33], [-6.3952937693255811e-20, -4.4351033364020533e-20, -2.1153143887917044e-20, -6.8231391222836407e-21, -1.4504315828672159e-21, -1.9587807671131407e-22, -1.5966152840422813e-23, -7.3003290732623435e-25, -1.6771906840614304e-26, -1.6169509498289571e-28, -4.6618809807508163e-31, -1.7326371431267401e-34], [5.7842155368543423e-22, 4.8003762624035013e-22, 2.9878651747263311e-22, 1.2638526715054450e-22, 3.4156318426301399e-23, 5.6399948699016454e-24, 5.4217449831085389e-25, 2.8371040873682669e-26, 7.2843388740955231e-28, 7.7086731190432700e-30, 2.4097040285553542e-32, 9.6650248547536186e-36], [5.0957340737107376e-25, -4.7885963205532357e-24, -6.8364494228342065e-24, -4.1628552316274124e-24, -1.3610340492511562e-24, -2.5101470556339434e-25, -2.5869934425880248e-26, -1.4188053613356977e-27, -3.7680346426973381e-29, -4.0932117392147652e-31, -1.3085241421404481e-33, -5.3721013037180639e-37], [-3.4114723719780527e-25, 2.7117657089047439e-26, 2.4651427858593204e-25, 1.8004643995552050e-25, 6.2756602002243891e-26, 1.1938768245742253e-26, 1.2528496984679473e-27, 6.9548584597555009e-29, 1.8643420001801807e-30, 2.0422076205276982e-32, 6.5880158663792221e-35, 2.7403637124113835e-38], [1.8347890405705450e-26, 8.3884087828751448e-28, -1.0137158454929460e-26, -7.8092660210520685e-27, -2.7673885466551615e-27, -5.3077393920819320e-28, -5.5995338395366702e-29, -3.1219117511511348e-30, -8.4047513586820039e-32, -9.2532350462516346e-34, -3.0061060024315736e-36, -1.2660495719080572e-39]],
        [[4.5006664087873162e-2, 3.0168765614221002e-2, 1.3466185499960964e-2, 3.9474647324407641e-3, 7.4303074866048104e-4, 8.6832852734740664e-5, 5.9969628653782823e-6, 2.2752014301211510e-7, 4.2367599500261729e-9, 3.2113313400101791e-11, 6.9414420053539195e-14, 1.7545609264374896e-17], [-5.0014351873215350e-4, -3.3525507601914253e-4, -1.4964507004480239e-4, -4.3866812646603669e-5, -8.2570441667873418e-6, -9.6494351204790110e-7, -6.6642177779836198e-8, -2.5283527945665774e-9, -4.7081650522013105e-11, -3.5686416425079431e-13, -7.7137848383691037e-16, -1.9497829793843740e-19], [4.1683987826393837e-6, 2.7941516756202033e-6, 1.2472026621620768e-6, 3.6560379515008733e-7, 6.8817552576934887e-8, 8.0422303163079379e-9, 5.5542291988760659e-10, 2.1072316964838797e-11, 3.9239755892047339e-13, 2.9742505984750131e-15, 6.4289809819990018e-18, 1.6250281841583032e-21], [-3.8601150367370337e-8, -2.5875036172636033e-8, -1.1549628627891476e-8, -3.3856471164082949e-9, -6.3727990373666279e-10, -7.4474485897256501e-11, -5.1434534596726387e-12, -1.9513866089841683e-13, -3.6337692422456951e-15, -2.7542834303083044e-17, -5.9535122158604296e-20, -1.5048460381675027e-23], [3.7533586428698385e-10, 2.5159430332745008e-10, 1.1230210601459028e-10, 3.2920137278776810e-11, 6.1965543809011282e-12, 7.2414857933546503e-13, 5.0012107027898017e-14, 1.8974217775853334e-15, 3.5332812237078956e-17, 2.6781192463353965e-19, 5.7888881917194524e-22, 1.4632384135549490e-25], [-3.7538232669402734e-12, -2.5162561017346750e-12, -1.1231622840259037e-12, -3.2924344856737477e-13, -6.1973643653536795e-14, -7.2424607343297380e-15, -5.0019100053955152e-16, -1.8977001638714426e-17, -3.5338324904988215e-19, -2.6785720205772338e-21, -5.7899807790285966e-24, -1.4635656272129365e-27], [3.8237832238319587e-14, 2.5631694926148719e-14, 1.1441190665355523e-14, 3.3539421672686433e-15, 6.3133399384874677e-16, 7.3783085637738361e-17, 5.0960199735966148e-18, 1.9335504609508521e-19, 3.6009580513376840e-21, 2.7298422658074851e-23, 5.9020846189525984e-26, 1.4924797125079537e-29], [-3.9453780108046358e-16, -2.6448462089756214e-16, -1.1807313947976600e-16, -3.4619762636614328e-17, -6.5185778783439227e-18, -7.6211342311891248e-19, -5.2664572995491777e-20, -1.9995938104770731e-21, -3.7274265387134557e-23, -2.8294283454765871e-25, -6.1296032173026049e-28, -1.5555628806020708e-31], [4.1079589572775248e-18, 2.7552116852963785e-18, 1.2312599671033938e-18, 3.6158895052545697e-19, 6.8237077932143545e-20, 8.0020993100480662e-21, 5.5519752182718367e-22, 2.1192560807017412e-23, 3.9789531697818456e-25, 3.0508614770216031e-27, 6.7099934871110211e-30, 1.7489134870170314e-33], [-4.2947501394693326e-20, -2.8903530627482227e-20, -1.3006634976007756e-20, -3.8609378085313034e-21, -7.3957516041631046e-22, -8.8459810907082351e-23, -6.2962286188251412e-24, -2.4834622301318634e-25, -4.8648372126503275e-27, -3.9459166664230490e-29, -9.3876633511636970e-32, -2.7693894064729581e-35], [4.4283441456778673e-22, 3.0431693002042198e-22, 1.4267437231037171e-22, 4.4957609089650398e-23, 9.2976704404091528e-24, 1.2189083574883433e-24, 9.6381736870230573e-26, 4.2762028146275112e-27, 9.5387668883820355e-29, 8.9321478325878214e-31, 2.4990405867929999e-33, 8.9667368060244469e-37], [-4.0965045036244215e-24, -3.1815633689279901e-24, -1.8186896432203514e-24, -7.1589702946833623e-25, -1.8350773886007559e-25, -2.9180062776392971e-26, -2.7294272087185040e-27, -1.3990035312955472e-28, -3.5324368809754481e-30, -3.6831938561938024e-32, -1.1340081645834354e-34, -4.4582069393949509e-38], [1.2827667179798873e-26, 3.1494989904911317e-26, 3.5016634027440461e-26, 1.9882110411095052e-26, 6.3104148936925910e-27, 1.1454202015645061e-27, 1.1684306072477766e-28, 6.3582604970279441e-30, 1.6767850922248028e-31, 1.8078536621829053e-33, 5.7236713843655491e-36, 2.3121211213575541e-39], [1.2862658795666176e-27, -2.2972756504186180e-28, -1.0993093667297076e-27, -7.8038329176523823e-28, -2.6933635033126937e-28, -5.0954466105077698e-29, -5.3247010571021504e-30, -2.9438913937651080e-31, -7.8547372160767267e-33, -8.5516066078619441e-35, -2.7338855796757331e-37, -1.1183263205618778e-40]],
        [[4.4038325893390504e-2, 2.9519671338590080e-2, 1.3176454589707509e-2, 3.8625332906355554e-3, 7.2704411494312892e-4, 8.4964605675226361e-5, 5.8679355688365249e-6, 2.2262494695687239e-7, 4.1456041942316512e-9, 3.1422381322605469e-11, 6.7920938242428456e-14, 1.7168107755572424e-17], [-4.6855249181614313e-4, -3.1407905007053067e-4, -1.4019290029914189e-4, -4.1096012651194370e-5, -7.7354968611255138e-6, -9.0399389390508577e-7, -6.2432796361593530e-8, -2.3686521120326110e-9, -4.4107788747708090e-11, -3.3432322344252008e-13, -7.2265519215224245e-16, -1.8266270358077877e-19], [3.7388915574375597e-6, 2.5062453603309886e-6, 1.1186922714287380e-6, 3.2793238204254999e-7, 6.1726667586202834e-8, 7.2135677375856367e-9, 4.9819275181510201e-10, 1.8901048529784484e-11, 3.5196534413644166e-13, 2.6677870677718139e-15, 5.7665457895855958e-18, 1.4575870430069063e-21], [-3.3150032043640344e-8, -2.2221054754905601e-8, -9.9186307217658507e-9, -2.9075379210964494e-9, -5.4728546717264655e-10, -6.3957458717276840e-11, -4.4171128027243651e-12, -1.6758185122679617e-13, -3.1206207426470918e-15, -2.3653327894276071e-17, -5.1127768326878531e-20, -1.2923364539780280e-23], [3.0861279205921444e-10, 2.0686863186402093e-10, 9.2338262297574023e-11, 2.7067950184701208e-11, 5.0949966615705507e-12, 5.9541695379867752e-13, 4.1121457570887320e-14, 1.5601164274877070e-15, 2.9051665772777611e-17, 2.2020254348027063e-19, 4.7597808886445641e-22, 1.2031112781864529e-25], [-2.9551404252039018e-12, -1.9808831777601187e-12, -8.8419074499122307e-13, -2.5919087464109776e-13, -4.8787475124318085e-14, -5.7014559166301203e-15, -3.9376150191815915e-16, -1.4939016216903585e-17, -2.7818668857881301e-19, -2.1085702643142781e-21, -4.5577800733918107e-24, -1.1520553571303912e-27], [2.8821120800896593e-14, 1.9319321402024302e-14, 8.6234192744214720e-15, 2.5278661614406057e-15, 4.7582130531564786e-16, 5.5606158173091198e-17, 3.8403646355877487e-18, 1.4570148281324627e-19, 2.7132014173970661e-21, 2.0565484888797211e-23, 4.4454118785415550e-26, 1.1236875951240353e-29], [-2.8473760063697391e-16, -1.9086591625517884e-16, -8.5196401218568681e-17, -2.4974912993294058e-17, -4.7011628640873041e-18, -5.4941411681545641e-19, -3.7946343087718947e-20, -1.4397552152845464e-21, -2.6812876263561835e-23, -2.0325985848856549e-25, -4.3944219978814714e-28, -1.1111461114344871e-31], [2.8399666274320895e-18, 1.9037870418244021e-18, 8.4987561369743860e-19, 2.4917640904113870e-19, 4.6914308265735320e-20, 5.4844210615009667e-21, 3.7894352653677386e-22, 1.4385450723672387e-23, 2.6809511407434339e-25, 2.0343815956648541e-27, 4.4049250554037185e-30, 1.1167831815978033e-33], [-2.8525394492820888e-20, -1.9129154793627017e-20, -8.5459033468203772e-21, -2.5085128470906151e-21, -4.7307389052712828e-22, -5.5426406854900178e-23, -3.8409074309221202e-24, -1.4637542753096354e-25, -2.7422117819420181e-27, -2.0960833239980695e-29, -4.5883278776018780e-32, -1.1857458030177485e-35], [2.8754373569280937e-22, 1.9328897179004107e-22, 8.6773315940457145e-23, 2.5663845482033489e-23, 4.8911214592215953e-24, 5.8113604010692792e-25, 4.1011406054606314e-26, 1.6002009002018862e-27, 3.0915739165320782e-29, 2.4628267801667885e-31, 5.7166951142242538e-34, 1.6238004725467126e-37], [-2.8741927327618254e-24, -1.9594838330811703e-24, -9.0468070263825930e-25, -2.7895143958261342e-25, -5.6167472249762842e-26, -7.1427592250916985e-27, -5.4651867787976559e-28, -2.3427484943058435e-29, -5.0442550943462475e-31, -4.5548467053459048e-33, -1.2263971725458258e-35, -4.2089429951588835e-39], [2.6841696640238874e-26, 1.9790857869373470e-26, 1.0480573554535360e-26, 3.8261373885435151e-27, 9.2106333979213243e-28, 1.3943424648572486e-28, 1.2557441545072425e-29, 6.2486216687290090e-31, 1.5404191832134329e-32, 1.5733346413411894e-34, 4.7497590224592540e-37, 1.8247413328832785e-40], [-1.5620854603563928e-28, -1.9629254078218195e-28, -1.6931631518399913e-28, -8.7278302741483641e-29, -2.6455454141220506e-29, -4.6804774907046200e-30, -4.6963113861759751e-31, -2.5241343175432947e-32, -6.5971765667906032e-34, -7.0488794253546944e-36, -2.2082003918397742e-38, -8.7810679201801413e-42]],
        [[4.3129928779613549e-2, 2.8910756633055232e-2, 1.2904658305986772e-2, 3.7828591880918658e-3, 7.1204706947863446e-4, 8.3212004934782333e-5, 5.7468951880674114e-6, 2.1803276832227844e-7, 4.0600910688228357e-9, 3.0774218616086996e-11, 6.6519904415341949e-14, 1.6813973959203776e-17], [-4.4015287860363015e-4, -2.9504228536225306e-4, -1.3169561512147258e-4, -3.8605126604752452e-5, -7.2666377200343767e-6, -8.4920157632494626e-7, -5.8648658405796563e-8, -2.2250848383586201e-9, -4.1434354794967645e-11, -3.1405943144196617e-13, -6.7885406355505905e-16, -1.7159126500620123e-19], [3.3688823618175941e-6, 2.2582216304049353e-6, 1.0079839448502547e-6, 2.9547944911201006e-7, 5.5618056441045118e-8, 6.4996966990360342e-9, 4.4889046614133007e-10, 1.7030557858437474e-11, 3.1713405462230153e-13, 2.4037768025905311e-15, 5.1958753247654632e-18, 1.3133409191684241e-21], [-2.8650004460783825e-8, -1.9204606405567338e-8, -8.5722033054006919e-9, -2.5128474748026352e-9, -4.7299293778054023e-10, -5.5275405746207890e-11, -3.8175016163045116e-12, -1.4483306522099983e-13, -2.6970048548485998e-15, -2.0442452059741871e-17, -4.4187310634751817e-20, -1.1169052290971352e-23], [2.5583058491150995e-10, 1.7148778101178652e-10, 7.6545600202895994e-11, 2.2438504020134957e-11, 4.2235965589390341e-12, 4.9358245167138146e-13, 3.4088430203465388e-14, 1.2932887380181448e-15, 2.4082939982587744e-17, 1.8254114282132544e-19, 3.9457117054976582e-22, 9.9734200291423652e-26], [-2.3497112695635571e-12, -1.5750531677362345e-12, -7.0304362387658176e-13, -2.0608953786632171e-13, -3.8792206333874156e-14, -4.5333763484052164e-15, -3.1308991510776633e-16, -1.1878390258291722e-17, -2.2119312294470877e-19, -1.6765747218360387e-21, -3.6239946339637716e-24, -9.1602301603547538e-28], [2.1980893221519409e-14, 1.4734183550769461e-14, 6.5767778592066051e-15, 1.9279106840006718e-15, 3.6289044882556803e-16, 4.2408504227892127e-17, 2.9288722040730759e-18, 1.1111921083322477e-19, 2.0692047505325049e-21, 1.5683939524184725e-23, 3.3901614561311408e-26, 8.5691992222237172e-30], [-2.0829544062600846e-16, -1.3962420664769344e-16, -6.2322986476798883e-17, -1.8269332462470745e-17, -3.4388423960266139e-18, -4.0187499795967667e-19, -2.7754932182486819e-20, -1.0530067610798208e-21, -1.9608686880329676e-23, -1.4862929414900802e-25, -3.2127423701783833e-28, -8.1209456564458167e-32], [1.9928203812339095e-18, 1.3358295781399939e-18, 5.9626946489075893e-19, 1.7479265802710995e-19, 3.2901939858865936e-20, 3.8451382878286281e-21, 2.6556856623752100e-22, 1.0076000294429798e-23, 1.8764330151365128e-25, 1.4224181900996315e-27, 3.0750768401680978e-30, 7.7747469235598610e-34], [-1.9206424063349464e-20, -1.2874927272989547e-20, -5.7473512093179076e-21, -1.6849900568022169e-21, -3.1722301551735636e-22, -3.7080717036558749e-23, -2.5617445697934421e-24, -9.7232183139482125e-26, -1.8116475074808435e-27, -1.3742728344447308e-29, -2.9741168481195654e-32, -7.5333231052363958e-36], [1.8615201986399119e-22, 1.2481702921255517e-22, 5.5746454944844890e-23, 1.6356496874315454e-23, 3.0827715875688736e-24, 3.6089085255590862e-25, 2.4981826134214048e-26, 9.5068277527046366e-28, 1.7775674428071003e-29, 1.3550328302998168e-31, 2.9539570990939886e-34, 7.5779042230235721e-38], [-1.8101638740323547e-24, -1.2156340632999003e-24, -5.4466509587892525e-25, -1.6060118064004417e-25, -3.0479235082888906e-26, -3.6012089657902171e-27, -2.5231217512771316e-28, -9.7538268494185460e-30, -1.8618962666338598e-31, -1.4597315611998618e-33, -3.3134108133114285e-36, -9.0842823832819570e-40], [1.7530574160688966e-26, 1.1878512555997327e-26, 5.4177769592419380e-27, 1.6413606987803999e-27, 3.2311601809833854e-28, 3.9992760693748547e-29, 2.9664170360030550e-30, 1.2288550772390432e-31, 2.5481039907786763e-33, 2.2086738571198548e-35, 5.6840432403286686e-38, 1.8473505329095536e-41], [-1.6774563677449658e-28, -1.1757549188262813e-28, -5.8830006346950903e-29, -2.0055203750032844e-29, -4.4972114998537146e-30, -6.3872090941356686e-31, -5.4835696425504075e-32, -2.6104841174215271e-33, -6.2391881586358957e-35, -6.1855142469385281e-37, -1.8127773468731156e-39, -6.7257947229890204e-43]],
        [[4.2275532257778639e-2, 2.8338039482579116e-2, 1.2649019229269474e-2, 3.7079213937492809e-3, 6.9794153866141511e-4, 8.1563589330980131e-5, 5.6330501760544074e-6, 2.1371357642533580e-7, 3.9796613582786433e-9, 3.0164586602036282e-11, 6.5202156471548760e-14, 1.6480892007170373e-17], [-4.1451082868840764e-4, -2.7785396426717644e-4, -1.2402340462207591e-4, -3.6356102160054875e-5, -6.8433041552865536e-6, -7.9972951725912481e-7, -5.5231955029734656e-8, -2.0954577490797003e-9, -3.9020507594338678e-11, -2.9576322571676558e-13, -6.3930596418029611e-16, -1.6159484786048820e-19], [3.0481789593123969e-6, 2.0432484485886120e-6, 9.1202812150297749e-7, 2.6735105087016802e-7, 5.0323451872969083e-8, 5.8809529665722815e-9, 4.0615798563369547e-10, 1.5409320526292693e-11, 2.8694422919483768e-13, 2.1749473817668089e-15, 4.7012498919470586e-18, 1.1883163987345530e-21], [-2.4905866854592562e-8, -1.6694844525440826e-8, -7.4519413935509876e-9, -2.1844549697771428e-9, -4.1117966128367358e-10, -4.8051716621818840e-11, -3.3186098478276861e-12, -1.2590549652128888e-13, -2.3445456656854648e-15, -1.7770921796886509e-17, -3.8412673740783633e-20, -9.7094200853314940e-24], [2.1367406600302562e-10, 1.4322951824658967e-10, 6.3932190216500486e-11, 1.8741021068040443e-11, 3.5276198420370764e-12, 4.1224847670296714e-13, 2.8471237884782127e-14, 1.0801767931236757e-15, 2.0114481805988015e-17, 1.5246147195979076e-19, 3.2955256063579309e-22, 8.3299701431512576e-26], [-1.8855421657228799e-12, -1.2639123743587914e-12, -5.6416224369727704e-13, -1.6537798044933038e-13, -3.1129074762342656e-14, -3.6378391795778331e-15, -2.5124115851112156e-16, -9.5318956882595115e-18, -1.7749792840075430e-19, -1.3453787091417937e-21, -2.9080986568285329e-24, -7.3506864075715319e-28], [1.6946870549719595e-14, 1.1359788106522548e-14, 5.0705758732916891e-15, 1.4863837773994993e-15, 2.7978182053414166e-16, 3.2696162584866651e-17, 2.2581047663102132e-18, 8.5670755474056023e-20, 1.5953156479281766e-21, 1.2091993789590627e-23, 2.6137409524584853e-26, 6.6066511156702226e-30], [-1.5429312441245216e-16, -1.0342542371107802e-16, -4.6165165629786316e-17, -1.3532814298541962e-17, -2.5472802724073257e-18, -2.9768306256682258e-19, -2.0558979828257661e-20, -7.7999217084240566e-22, -1.4524610795041035e-23, -1.1009208935927802e-25, -2.3796945290359742e-28, -6.0150722248193721e-32], [1.4182715489521280e-18, 9.5069297996395485e-19, 4.2435341852070961e-19, 1.2439471834721720e-19, 2.3414844101535098e-20, 2.7363372965574358e-21, 1.8898108552666556e-22, 7.1698273772593650e-24, 1.3351350606315493e-25, 1.0119985913738206e-27, 2.1875076602146648e-30, 5.5293879312605896e-34], [-1.3133363710002252e-20, -8.8035578860762900e-21, -3.9296006316834180e-21, -1.1519323287023103e-21, -2.1683149731333429e-22, -2.5340133026322427e-23, -1.7501221775413339e-24, -6.6400740540179601e-26, -1.2365407068906981e-27, -9.3732335094130121e-30, -2.0262737107306654e-32, -5.1226273680007178e-36], [1.2232910419418707e-22, 8.2001576563198747e-23, 3.6604389486517208e-23, 1.0731095556429456e-23, 2.0201564133636651e-24, 2.3611999087492454e-25, 1.6310717853548648e-26, 6.1899099157703287e-28, 1.1530889112781003e-29, 8.7446461563365429e-32, 1.8916720039821620e-34, 4.7879631314637623e-38], [-1.1446936052040152e-24, -7.6745155833655864e-25, -3.4269030547562509e-25, -1.0051465269569404e-25, -1.8935534992675030e-26, -2.2153192423791746e-27, -1.5322189297857770e-28, -5.8243614415769598e-30, -1.0873927620913540e-31, -8.2718015621999468e-34, -1.7975401366439466e-36, -4.5856772828407329e-40], [1.0743778404242539e-26, 7.2124566488225583e-27, 3.2261311927126015e-27, 9.4931133947244890e-28, 1.7956710482628511e-28, 2.1133779545459535e-29, 1.4726864061000047e-30, 5.6528515764457387e-32, 1.0690298274683129e-33, 8.2760181234092580e-36, 1.8456628590854945e-38, 4.9147916201572350e-42], [-1.0610179175222609e-28, -6.8370292919467514e-29, -3.1786868439843092e-29, -9.4680917128870100e-30, -1.8304038191456290e-30, -2.2258247500132483e-31, -1.6041964688561181e-32, -6.4489635219283531e-34, -1.2828001922759220e-35, -1.0463342851543699e-37, -2.6156717209284997e-40, -7.9135828454057750e-44]],
        [[4.1469988831438106e-2, 2.7798069428946738e-2, 1.2407997206704207e-2, 3.6372684286746052e-3, 6.8464254067339444e-4, 8.0009427627854067e-5, 5.5257146489249504e-6, 2.0964134936124060e-7, 3.9038304964298732e-9, 2.9589812420663806e-11, 6.3959755353837938e-14, 1.6166855175282539e-17], [-3.9126548866342848e-4, -2.6227220034289994e-4, -1.1706829992525033e-4, -3.4317289424166899e-5, -6.4595387118424133e-6, -7.5488151023473409e-7, -5.2134603920782209e-8, -1.9779466383579907e-9, -3.6832277747972146e-11, -2.7917712886996085e-13, -6.0345434465951304e-16, -1.5253277535277475e-19], [2.7686445902095240e-6, 1.8558716004374027e-6, 8.2839024821809512e-7, 2.4283352472368428e-7, 4.5708521267450616e-8, 5.3416380184721244e-9, 3.6891111863985559e-10, 1.3996203137466001e-11, 2.6062990344580476e-13, 1.9754930346566164e-15, 4.2701200468447780e-18, 1.0793414076789825e-21], [-2.1768051710935891e-8, -1.4591511351813952e-8, -6.5130937440707539e-9, -1.9092420681324927e-9, -3.5937637430937207e-10, -4.1997825585294708e-11, -2.9005081893493165e-12, -1.1004304226370232e-13, -2.0491634194215679e-15, -1.5532016888405675e-17, -3.3573176680281412e-20, -8.4861594945550934e-24], [1.7970530118690058e-10, 1.2045965238749694e-10, 5.3768591166671175e-11, 1.5761673366578211e-11, 2.9668176299377730e-12, 3.4671140974607499e-13, 2.3945032136835058e-14, 9.0845603992487530e-16, 1.6916788621041652e-17, 1.2822395914062658e-19, 2.7716204958547888e-22, 7.0057158460809221e-26], [-1.5259366788449220e-12, -1.0228624347087112e-12, -4.5656675063760392e-13, -1.3383754042705694e-13, -2.5192221998350323e-14, -2.9440403469441468e-15, -2.0332512500998861e-16, -7.7139983300132145e-18, -1.4364600318195329e-19, -1.0887917122494988e-21, -2.3534739115701021e-24, -5.9487832164537157e-28], [1.3197174929236484e-14, 8.8463005508211540e-15, 3.9486509256252219e-15, 1.1575037550339315e-15, 2.1787677432166845e-16, 2.5461748281272110e-17, 1.7584722190377609e-18, 6.6715079079291280e-20, 1.2423329747392515e-21, 9.4164948744024762e-24, 2.0354191640003948e-26, 5.1448488260839025e-30], [-1.1561901180505145e-16, -7.7501475592494290e-17, -3.4593700871889181e-17, -1.0140764470766037e-17, -1.9087947403004605e-18, -2.2306761314123761e-19, -1.5405784587789107e-20, -5.8448359625517891e-22, -1.0883945315980534e-23, -8.2496901162824556e-26, -1.7832090245392528e-28, -4.5073477717431828e-32], [1.0226651155293765e-18, 6.8551059644176448e-19, 3.0598578559391178e-19, 8.9696389365958685e-20, 1.6883541514753208e-20, 1.9730628270888233e-21, 1.3626625241742726e-22, 5.1698381304206135e-24, 9.6270036978345608e-26, 7.2969715902354951e-28, 1.5772757047206994e-30, 3.9868234483174806e-34], [-9.1126068399336138e-21, -6.1083438188996777e-21, -2.7265331306754260e-21, -7.9925403822102164e-22, -1.5044367045418512e-22, -1.7581338916861706e-23, -1.2142279155241678e-24, -4.6067006135810103e-26, -8.5783883534530032e-28, -6.5021848837814950e-30, -1.4054886683879985e-32, -3.5526462066407361e-36], [8.1676692228860544e-23, 5.4749460865695951e-23, 2.4438184922672520e-23, 7.1638386828476249e-24, 1.3484623216529955e-24, 1.5758762324959790e-25, 1.0883718537498084e-26, 4.1292978289264106e-28, 7.6896061206619134e-30, 5.8287376343943384e-32, 1.2599905206816638e-34, 3.1851803612375096e-38], [-7.3556137729173535e-25, -4.9306956385213370e-25, -2.2009446053176480e-25, -6.4521722298931777e-26, -1.2145824148664777e-26, -1.4195403417713540e-27, -9.8051229187496078e-29, -3.7206389304575548e-30, -6.9300063731379545e-32, -5.2544293112683271e-34, -1.1363147247889643e-36, -2.8745183220992367e-40], [6.6523231457100031e-27, 4.4599659956857797e-27, 1.9918315252774180e-27, 5.8393491573727044e-28, 1.0994088547679776e-28, 1.2857453282159347e-29, 8.8890264835008378e-31, 3.3762562178538894e-32, 6.2980972183885326e-34, 4.7837109948697622e-36, 1.0374438711624679e-38, 2.6343034854029099e-42], [-6.3376521653380931e-29, -4.5035505606992406e-29, -1.9411612989188469e-29, -5.6699377562760224e-30, -1.0813821504885131e-30, -1.2812936787159082e-31, -8.6013406980579944e-33, -3.4182032299796895e-34, -6.5878061975369056e-36, -4.9912592161868223e-38, -1.0372491307130257e-40, -2.8219898984684151e-44]],
    ],
    [
        [[1.1518514635639918e-1, 1.1020830692432842e-1, 1.0112009080953890e-1, 8.9347963480568231e-2, 7.6434622771353364e-2, 6.3655144675098430e-2, 5.1825722048581278e-2, 4.1306682502503774e-2, 3.2120608672754452e-2, 2.4096026434471030e-2, 1.6981166758081344e-2, 1.0511827565856286e-2, 4.4466570892076887e-3], [-3.0895680036561168e-3, -6.2603129447074532e-3, -1.1670860562266475e-2, -1.7841688584292735e-2, -2.3289466747928604e-2, -2.6958227763635855e-2, -2.8382955858500985e-2, -2.7607732892261332e-2, -2.4983670422187217e-2, -2.0969826212540090e-2, -1.6001307788099259e-2, -1.0431963877585266e-2, -4.5365530803404316e-3], [4.5971910892395476e-5, 1.8662869950355792e-4, 5.4843160210835703e-4, 1.2133376237193328e-3, 2.1714156866091566e-3, 3.2837675598427878e-3, 4.3218397420357822e-3, 5.0487343475965943e-3, 5.2921008203342032e-3, 4.9790956915008359e-3, 4.1335797000579175e-3, 2.8523638117844036e-3, 1.2794676851136889e-3], [-7.1748980303980162e-7, -5.0645164969275216e-6, -2.1649038926178042e-5, -6.5674067720328218e-5, -1.5408362771653139e-4, -2.9394903778095371e-4, -4.7137933455781344e-4, -6.4972674294663254e-4, -7.7977682085757407e-4, -8.1659155815949098e-4, -7.3462778323710715e-4, -5.3547578193336363e-4, -2.4754774456497573e-4], [1.1337282882409876e-8, 1.2731241839605745e-7, 7.5942064968206805e-7, 3.0460915453977404e-6, 9.0840829989764956e-6, 2.1317044942307650e-5, 4.0829923248862298e-5, 6.5400857002379108e-5, 8.8869761655691738e-5, 1.0276826103743167e-4, 9.9653796856747702e-5, 7.6476297372825407e-5, 3.6375223187470665e-5], [-1.7840783129500507e-10, -3.0180869216640734e-9, -2.4364244494573335e-8, -1.2577770301393328e-7, -4.6587375387302363e-7, -1.3187550520222184e-6, -2.9687788127129991e-6, -5.4553168377593109e-6, -8.3092312835378660e-6, -1.0530992595616710e-5, -1.0948437087296883e-5, -8.8151709056904518e-6, -4.3058817468654243e-6], [2.7774749922257706e-12, 6.8240372937417661e-11, 7.2756171171122099e-10, 4.7326596310359853e-9, 2.1374333044715697e-8, 7.1835739016614476e-8, 1.8753370785037039e-7, 3.9096262812194787e-7, 6.6156814132112163e-7, 9.1262487557926701e-7, 1.0121121767552254e-6, 8.5209177537281609e-7, 4.2665316990333028e-7], [-4.2702142587037719e-14, -1.4827623073576133e-12, -2.0462895584760210e-11, -1.6482516185680816e-10, -8.9390835184303684e-10, -3.5195815144313147e-9, -1.0533189117886488e-8, -2.4672906844315423e-8, -4.6015999005195307e-8, -6.8661540122186735e-8, -8.0848283016190244e-8, -7.0946067135738992e-8, -3.6351150933686338e-8], [6.4830237220586655e-16, 3.1128574138034849e-14, 5.4666186139371453e-13, 5.3725363377555615e-12, 3.4535115045465101e-11, 1.5747381091981047e-10, 5.3487367356899261e-10, 1.3957117415883375e-9, 2.8486637027542158e-9, 4.5714931699925618e-9, 5.6906908278010423e-9, 5.1896654206782267e-9, 2.7165785162215230e-9], [-9.7265827517889906e-18, -6.3396052107345081e-16, -1.3959491319806635e-14, -1.6525750922598743e-13, -1.2448261571408208e-12, -6.5075168137789724e-12, -2.4864315538499493e-11, -7.1726707055964997e-11, -1.5918153595335563e-10, -2.7331693529685689e-10, -3.5826358294396986e-10, -3.3861468400298255e-10, -1.8081010655664202e-10], [1.4432367620016652e-19, 1.2564599781840147e-17, 3.4240409591189427e-16, 4.8276223345320029e-15, 4.2185228064859977e-14, 2.5056232718707878e-13, 1.0684190452090593e-12, 3.3838314077358978e-12, 8.1180771519894064e-12, 1.4843015621476983e-11, 2.0412898864966582e-11, 1.9945179315567800e-11, 1.0848690709376872e-11], [-2.1197803949417953e-21, -2.4294653326790602e-19, -8.0985403496662842e-18, -1.3461185519691009e-16, -1.3522244963462640e-15, -9.0516859128882560e-15, -4.2765766795904831e-14, -1.4777574761182080e-13, -3.8121266049375973e-13, -7.3899266441181721e-13, -1.0627004384690651e-12, -1.0709235865985729e-12, -5.9258890698449252e-13], [3.0840104064584366e-23, 4.5923726953359003e-21, 1.8528186127239665e-19, 3.5973330074691356e-18, 4.1200767877190958e-17, 3.0853628996795812e-16, 1.6045968395951255e-15, 6.0148230136282871e-15, 1.6602940213296153e-14, 3.3987654312173686e-14, 5.0948827612634360e-14, 5.2839214240615840e-14, 2.9708568088450811e-14], [-4.4464716846938616e-25, -8.4981156351559064e-23, -4.1090492135536129e-21, -9.2390019646062135e-20, -1.1971940737193115e-18, -9.9604565871730255e-18, -5.6669375204778901e-17, -2.2919151095118364e-16, -6.7381516705031416e-16, -1.4510339833352634e-15, -2.2606946926921310e-15, -2.4078770410035403e-15, -1.3739896961780093e-15]],
        [[1.0934853270169943e-1, 9.9010004670911841e-2, 8.1467922775248310e-2, 6.1355718881708634e-2, 4.2741995336588033e-2, 2.7912273332903621e-2, 1.7350675235287713e-2, 1.0427846771726192e-2, 6.1408071320205859e-3, 3.5672147802440250e-3, 2.0258596484671693e-3, 1.0681248142217088e-3, 4.1158158850528509e-4], [-2.7533979955240390e-3, -4.9798232232032480e-3, -8.1477098197578779e-3, -1.0616473711096199e-2, -1.1405000488688731e-2, -1.0527967592832007e-2, -8.6385577639289224e-3, -6.4765868176718642e-3, -4.5334793922629058e-3, -3.0017824569001686e-3, -1.8732929646236789e-3, -1.0509996129070960e-3, -4.1872503909499398e-4], [3.8343377743543602e-5, 1.3633858136850289e-4, 3.4808233346422065e-4, 6.5107405968609508e-4, 9.5848546806523337e-4, 1.1640606861287839e-3, 1.2090916184193398e-3, 1.1062119037124892e-3, 9.1251399809651997e-4, 6.8862875387695404e-4, 4.7428143948777009e-4, 2.8467187394335852e-4, 1.1771584967646530e-4], [-5.6138483627033275e-7, -3.4337567548140352e-6, -1.2612229048492146e-5, -3.2168535800692735e-5, -6.2104452498126478e-5, -9.5684509268037769e-5, -1.2232294023948953e-4, -1.3381161637870587e-4, -1.2827631080977571e-4, -1.0935273216288193e-4, -8.2691434311333047e-5, -5.2956781317702950e-5, -2.2702927753130145e-5], [8.3497461078603334e-9, 8.0468856428747567e-8, 4.0888222101790798e-7, 1.3736958581623238e-6, 3.3734366038439165e-6, 6.4257074970854439e-6, 9.8987331424217308e-6, 1.2731362789444529e-5, 1.4002314634709740e-5, 1.3358048426199421e-5, 1.1019019704564016e-5, 7.4987100805036741e-6, 3.3258362599560402e-6], [-1.2403988090230447e-10, -1.7840396512002668e-9, -1.2186168352299271e-8, -5.2552077687559692e-8, -1.6047729355310821e-7, -3.7053648780045659e-7, -6.7635926271318502e-7, -1.0085711672593181e-6, -1.2583721468053413e-6, -1.3317613371049475e-6, -1.1907748183844856e-6, -8.5746712774742998e-7, -3.9254929061103170e-7], [1.8266161964281513e-12, 3.7824736597218092e-11, 3.3942019596093793e-10, 1.8411029223205255e-9, 6.8664503414699858e-9, 1.8914891763865765e-8, 4.0345737917145620e-8, 6.8927826269174255e-8, 9.6601243071127333e-8, 1.1252439226844039e-7, 1.0841037195727327e-7, 8.2269672211031056e-8, 3.8789049642813576e-8], [-2.6604166623779906e-14, -7.7239482463869607e-13, -8.9336903368979932e-12, -5.9945300779885333e-11, -2.6901357584887500e-10, -8.7238449514721811e-10, -2.1488727254698170e-9, -4.1629381062547927e-9, -6.4965133969371252e-9, -8.2698823916747592e-9, -8.5382689246475059e-9, -6.8025530558777843e-9, -3.2962265707720239e-9], [3.8301493538760795e-16, 1.5268550601944439e-14, 2.2397858567495343e-13, 1.8330753540547821e-12, 9.7735086850798139e-12, 3.6886452149825597e-11, 1.0385182004004998e-10, 2.2607810446617512e-10, 3.8980591653956352e-10, 5.3879965074921232e-10, 5.9315679557264558e-10, 4.9440097726638424e-10, 2.4572253727473147e-10], [-5.4540604221195337e-18, -2.9329705340957369e-16, -5.3808857062674489e-15, -5.3057889093572266e-14, -3.3240272376059404e-13, -1.4454330628405383e-12, -4.6094263168071667e-12, -1.1185082103256880e-11, -2.1159089234358668e-11, -3.1571737027894707e-11, -3.6891045622084679e-11, -3.2065001157762187e-11, -1.6316408113752952e-11], [7.6857678094670535e-20, 5.4911011974818822e-18, 1.2444429575053219e-16, 1.4624536520990308e-15, 1.0660533236887200e-14, 5.2935045308100698e-14, 1.8965595224215284e-13, 5.0927269273464811e-13, 1.0503186106323222e-12, 1.6827985387109172e-12, 2.0783012838301288e-12, 1.8781153342979176e-12, 9.7680940290886690e-13], [-1.0727983000640365e-21, -1.0043501850031461e-19, -2.7807306655346725e-18, -3.8570004507728069e-17, -3.2426350619476678e-16, -1.8238618330211921e-15, -7.2878700587325750e-15, -2.1513525527988145e-14, -4.8093244615601462e-14, -8.2335544127836966e-14, -1.0706293494972613e-13, -1.0031374847323396e-13, -5.3243255505982769e-14], [1.4839577750738504e-23, 1.7981499859579677e-21, 6.0213365382194068e-20, 9.7707944582048219e-19, 9.3982976211097268e-18, 5.9441022831118807e-17, 2.6313149365632509e-16, 8.4877494452711344e-16, 2.0458114361081257e-15, 3.7257653220603761e-15, 5.0827244814698957e-15, 4.9251747912697800e-15, 2.6638881471868418e-15], [-2.0353665047482650e-25, -3.1553818812487722e-23, -1.2660791608707709e-21, -2.3838046253260751e-20, -2.6038028376586294e-19, -1.8390729996438757e-18, -8.9623928457015782e-18, -3.1410511540528006e-17, -8.1219813521008224e-17, -1.5667604071980177e-16, -2.2347715688827094e-16, -2.2341006046948947e-16, -1.2296601511507768e-16]],
        [[1.0412863900819667e-1, 9.0024428278826179e-2, 6.7545776761083860e-2, 4.4328397234240685e-2, 2.5756991051996287e-2, 1.3475824505329431e-2, 6.4873192044329529e-3, 2.9490453422269063e-3, 1.3022667233399658e-3, 5.7344843042610837e-4, 2.5525025464449206e-4, 1.1159095777748360e-4, 3.8465277304312597e-5], [-2.4715005440022228e-3, -4.0344715216531642e-3, -5.8732396997193685e-3, -6.6450238997822640e-3, -5.9968574276401460e-3, -4.4967726400838039e-3, -2.9107822243105171e-3, -1.6861595881132736e-3, -9.0478065988946633e-4, -4.6358140000556459e-4, -2.3068627894304020e-4, -1.0866677964197335e-4, -3.9003850412369115e-5], [3.2333547913631559e-5, 1.0182287013255911e-4, 2.2917741061192045e-4, 3.6870425303332345e-4, 4.5444425686802985e-4, 4.5003789076726457e-4, 3.7244517319863027e-4, 2.6712508282646130e-4, 1.7184135730175746e-4, 1.0214731204415260e-4, 5.7016193717491525e-5, 2.9100624793562921e-5, 1.0923982144097847e-5], [-4.4548385807270085e-7, -2.3888494199212591e-6, -7.6497705578730399e-6, -1.6667565884042822e-5, -2.6894524831265983e-5, -3.3897354778389083e-5, -3.4801130964654746e-5, -3.0199192175501624e-5, -2.2907772767353906e-5, -1.5624372106493720e-5, -9.7173492431926411e-6, -5.3547598454699634e-6, -2.0990408165679822e-6], [6.2534565485920876e-9, 5.2363050284385870e-8, 2.2989266777450365e-7, 6.5657372713478072e-7, 1.3462943339332618e-6, 2.1042225101285539e-6, 2.6214036209535899e-6, 2.7024436774138262e-6, 2.3823774328450530e-6, 1.8440222483537829e-6, 1.2678927730967871e-6, 7.5053440363231961e-7, 3.0641078420276382e-7], [-8.7917395641540816e-11, -1.0889892588421426e-9, -6.3816469879139577e-9, -2.3309291735740710e-8, -5.9413179207518839e-8, -1.1291599856930315e-7, -1.6776447584888043e-7, -2.0242660748611638e-7, -2.0482002219549890e-7, -1.7812342522191107e-7, -1.3437924782358764e-7, -8.5012388162281280e-8, -3.6044799372269434e-8], [1.2275239833796424e-12, 2.1709396937633818e-11, 1.6617570013133751e-10, 7.6137130805616713e-10, 2.3707496563083540e-9, 5.3930098350280880e-9, 9.4214927332373213e-9, 1.3139718207474796e-8, 1.5095642943298534e-8, 1.4618778144565512e-8, 1.2016939250951779e-8, 8.0850886080128865e-9, 3.5504504152055905e-9], [-1.6977051691906748e-14, -4.1768119261614705e-13, -4.1016429380848825e-12, -2.3202004392880805e-11, -8.6996647972433939e-11, -2.3377863631296468e-10, -4.7448942539520454e-10, -7.5666857577748183e-10, -9.7773031351382699e-10, -1.0459616998395500e-9, -9.3091831350160773e-10, -6.6309304294091169e-10, -3.0081129172498018e-10], [2.3229402228730938e-16, 7.7928882264463926e-15, 9.6686074352897952e-14, 6.6623225578342790e-13, 2.9714456096285970e-12, 9.3265895004911477e-12, 2.1765327951252682e-11, 3.9314497450642797e-11, 5.6658481237927841e-11, 6.6477635413659553e-11, 6.3690074806849468e-11, 4.7829223213778543e-11, 2.2361289120644931e-11], [-3.1467656780162236e-18, -1.4150553244121447e-16, -2.1889225032141804e-15, -1.8159792355042855e-14, -9.5319099445093614e-14, -3.4601359548361089e-13, -9.1998026926205952e-13, -1.8665002486462588e-12, -2.9776180829850578e-12, -3.8068803777456989e-12, -3.9054779936437014e-12, -3.0802680922997624e-12, -1.4808740151547437e-12], [4.2202836295694966e-20, 2.5077753840485432e-18, 4.7802541477412893e-17, 4.7256411298411242e-16, 2.8916388600647851e-15, 1.2033562434618914e-14, 3.6154927455791343e-14, 8.1771645708922079e-14, 1.4342238237914236e-13, 1.9862726704872250e-13, 2.1714875626732874e-13, 1.7923966430084071e-13, 8.8431528951437879e-14], [-5.6108610043804157e-22, -4.3473187308536075e-20, -1.0104851239114698e-18, -1.1793421719786561e-17, -8.3414241097905045e-17, -3.9480627545137295e-16, -1.3305534729762796e-15, -3.3318237506531421e-15, -6.3852679524869968e-15, -9.5274456532035511e-15, -1.1050641445594437e-14, -9.5152402573036974e-15, -4.8086492412676904e-15], [7.3936461658382464e-24, 7.3853092758706750e-22, 2.0734208032884378e-20, 2.8329475649781422e-19, 2.2982374161337401e-18, 1.2282808474769590e-17, 4.6120145265287907e-17, 1.2706892114052930e-16, 2.6457900045849867e-16, 4.2322842785075285e-16, 5.1869514344898272e-16, 4.6452012773470302e-16, 2.4004291092532881e-16], [-9.6732349912897341e-26, -1.2310576885903571e-23, -4.1378030672184796e-22, -6.5668253642389204e-21, -6.0663365028196239e-20, -3.6361913091205522e-19, -1.5115532922086524e-18, -4.5551461702168373e-18, -1.0249380205144197e-17, -1.7493947657412749e-17, -2.2566516773006014e-17, -2.0959324060739285e-17, -1.1056678422995115e-17]],
        [[9.9428496582194100e-2, 8.2688359376884822e-2, 5.7380552386434927e-2, 3.3460807346381790e-2, 1.6586335009796601e-2, 7.1086083392014476e-3, 2.6974532034589113e-3, 9.3539082526632844e-4, 3.0838650996248945e-4, 1.0108468753518891e-4, 3.4276462886050618e-5, 1.2052324800969187e-5, 3.6357715818716480e-6], [-2.2326384259159537e-3, -3.3217997974659072e-3, -4.3529420579137416e-3, -4.3467687984419910e-3, -3.3597186893384755e-3, -2.0861497071214504e-3, -1.0816252877828891e-3, -4.8761121672554835e-4, -1.9975097226241890e-4, -7.7907700248340451e-5, -3.0126416434158357e-5, -1.1587751198548462e-5, -3.6722207659034467e-6], [2.7534825086230968e-5, 7.7546734100322646e-5, 1.5584654657757182e-4, 2.1904261744667748e-4, 2.2988285793338016e-4, 1.8864352391224961e-4, 1.2593146561593834e-4, 7.1169403101086404e-5, 3.5531567011421075e-5, 1.6378353150770702e-5, 7.2344256143192929e-6, 3.0606636133508765e-6, 1.0239416673474910e-6], [-3.5804238966176661e-7, -1.7004933444093298e-6, -4.8094340035142918e-6, -9.0832143635104264e-6, -1.2437337981674424e-5, -1.3003074044251566e-5, -1.0828964266627623e-5, -7.4790138040560612e-6, -4.4637406044913785e-6, -2.3990860548975231e-6, -1.2001147501977633e-6, -5.5583188154480954e-7, -1.9589768371367242e-7], [4.7551462444787592e-9, 3.4974131223845122e-8, 1.3437920787311184e-7, 3.3078729116060977e-7, 5.7420092641972739e-7, 7.4532188858785293e-7, 7.5695443429625387e-7, 6.2656029470535842e-7, 4.3988064093505455e-7, 2.7216137853721544e-7, 1.5273918277806920e-7, 7.6959315705268608e-8, 2.8478664934745793e-8], [-6.3415249933616545e-11, -6.8422273207985212e-10, -3.4834535956445815e-9, -1.0918128641561661e-8, -2.3521448997563059e-8, -3.7179916396246351e-8, -4.5249075522135764e-8, -4.4192706438018270e-8, -3.6003367262429111e-8, -2.5354762347486953e-8, -1.5822505296711288e-8, -8.6190816450725258e-9, -3.3370920297756449e-9], [8.4127497411222843e-13, 1.2858779244223170e-11, 8.5000368186745605e-11, 3.3303194684085976e-10, 8.7565237534634359e-10, 1.6597062591345322e-9, 2.3862602349767664e-9, 2.7142906515835119e-9, 2.5364359794503511e-9, 2.0129049743993358e-9, 1.3855344313970593e-9, 8.1120087574143452e-10, 3.2750648930672916e-10], [-1.1073072302518986e-14, -2.3365490541904179e-13, -1.9716000043520079e-12, -9.5116911929737824e-12, -3.0104736132715157e-11, -6.7546922413267555e-11, -1.1336110605270350e-10, -1.4851469416892824e-10, -1.5758709696023470e-10, -1.3968493229143806e-10, -1.0527896211122808e-10, -6.5891362875292047e-11, -2.7652647586683010e-11], [1.4428069118772119e-16, 4.1238173390672386e-15, 4.3780331571440270e-14, 2.5676551079301222e-13, 9.6680186492900609e-13, 2.5397834748062385e-12, 4.9240787645407575e-12, 7.3583810649924608e-12, 8.7869854427669318e-12, 8.6308215780486042e-12, 7.0755711890627202e-12, 4.7105551410823670e-12, 2.0489628584497769e-12], [-1.8635403668609808e-18, -7.0934498722650010e-17, -9.3564486158944173e-16, -6.5972646908441067e-15, -2.9250880650098365e-14, -8.9104933523799713e-14, -1.9775964817233450e-13, -3.3420374893261583e-13, -4.4556527702035848e-13, -4.8150617639793053e-13, -4.2678759334964839e-13, -3.0086887823993272e-13, -1.3527944509035370e-13], [2.3827599048635201e-20, 1.1923414303488571e-18, 1.9324504384082261e-17, 1.6221403048333890e-16, 8.3925143270585943e-16, 2.9392457645644716e-15, 7.4069740572471250e-15, 1.4046838038564823e-14, 2.0758501936921883e-14, 2.4521584849022212e-14, 2.3370799807841501e-14, 1.7373673473538933e-14, 8.0551318467133402e-15], [-3.0247742843749805e-22, -1.9627174705614973e-20, -3.8698699191866629e-19, -3.8332995941326586e-18, -2.2953933259651672e-17, -9.1712185573276033e-17, -2.6049730115592218e-16, -5.5051159733624533e-16, -8.9589986345981770e-16, -1.1500183771564893e-15, -1.1726346720500052e-15, -9.1575885544093877e-16, -4.3682738513504226e-16], [3.8014338712132741e-24, 3.1694386280907020e-22, 7.5341387062484406e-21, 8.7362667897935293e-20, 6.0098543413793395e-19, 2.7202211802624529e-18, 8.6503595261464761e-18, 2.0241636226675113e-17, 3.6058884148445701e-17, 5.0025867958895622e-17, 5.4322838941500550e-17, 4.4410287644178275e-17, 2.1750080309617687e-17], [-4.7580399060839148e-26, -5.0269499668992742e-24, -1.4286649314338506e-22, -1.9248609683141205e-21, -1.5106896198557917e-20, -7.6951679295174537e-20, -2.7224038536727517e-19, -7.0110810766004573e-19, -1.3594263679258928e-18, -2.0278375237558054e-18, -2.3347543622900208e-18, -1.9914839814982450e-18, -9.9941123898847842e-19]],
        [[9.5170746357401786e-2, 7.6606606823720448e-2, 4.9761395446917453e-2, 2.6228558070345727e-2, 1.1323954949006746e-2, 4.0644318988042446e-3, 1.2402487522166709e-3, 3.3246657460920066e-4, 8.1966342608357123e-5, 1.9729557329965796e-5, 4.9565399089640443e-6, 1.3547530143231243e-6, 3.4829643768415230e-7], [-2.0283422118591991e-3, -2.7744777702834767e-3, -3.3051289580911762e-3, -2.9546124088662952e-3, -1.9910041559318027e-3, -1.0435065844539260e-3, -4.4093274353764978e-4, -1.5647615208014232e-4, -4.8994529589748866e-5, -1.4368727069299600e-5, -4.2107267520219923e-6, -1.2821261918239695e-6, -3.5012710742896461e-7], [2.3656242881811733e-5, 6.0095567036011946e-5, 1.0904850046727361e-4, 1.3578782598987691e-4, 1.2327777372077063e-4, 8.5200846522860625e-5, 4.6538775630704265e-5, 2.0909860953612490e-5, 8.0999940202747611e-6, 2.8605481590677588e-6, 9.7683020213404040e-7, 3.3299117120784294e-7, 9.7111700250187132e-8], [-2.9110623053883695e-7, -1.2355984380356675e-6, -3.1221522856173245e-6, -5.1795194088849124e-6, -6.1059254157500063e-6, -5.3715743398235027e-6, -3.6725404360729410e-6, -2.0324731173158124e-6, -9.5291408408319014e-7, -3.9869624414171138e-7, -1.5693273640925048e-7, -5.9517079130871326e-8, -1.8483714832323497e-8], [3.6660888140095052e-9, 2.3913984202843012e-8, 8.1341803612862311e-8, 1.7478727465096594e-7, 2.6029913548775448e-7, 2.8417169666544160e-7, 2.3766179903601706e-7, 1.5873345812337826e-7, 8.8496893959273468e-8, 4.3232006789305637e-8, 1.9394982598491564e-8, 8.1200820216905133e-9, 2.6740280193876433e-9], [-4.6479486125316431e-11, -4.4127620128152255e-10, -1.9741032447870089e-9, -5.3744945995623772e-9, -9.9073456083598624e-9, -1.3171709948392338e-8, -1.3241471163088485e-8, -1.0502675008687951e-8, -6.8624423977585426e-9, -3.8650307493656997e-9, -1.9559372130065758e-9, -8.9716983225493408e-10, -3.1191253212558153e-10], [5.8695629192612804e-13, 7.8370279244375686e-12, 4.5243388523815851e-11, 1.5335764199129853e-10, 3.4437307583213074e-10, 5.4926292886915224e-10, 6.5440906120825196e-10, 6.0827252958407231e-10, 4.6010640759485453e-10, 2.9549134701953429e-10, 1.6711725942433778e-10, 8.3393547591132197e-11, 3.0481088756484659e-11], [-7.3686849870404786e-15, -1.3480101163762289e-13, -9.8824713033523186e-13, -4.1113215302370739e-12, -1.1098899239773880e-11, -2.0974462157445224e-11, -2.9267366842748875e-11, -3.1521934149792941e-11, -2.7311230466514068e-11, -1.9807399783819549e-11, -1.2415048743231742e-11, -6.6966172974910090e-12, -2.5633769072798066e-12], [9.1572699698429624e-17, 2.2553521227116906e-15, 2.0711239916668573e-14, 1.0447580903443912e-13, 3.3528306725027683e-13, 7.4277491725772351e-13, 1.2015330833482808e-12, 1.4848428093632882e-12, 1.4598973721646100e-12, 1.1853873313689814e-12, 8.1725177330700052e-13, 4.7371016732274435e-13, 1.8922782398979055e-13], [-1.1306286173509484e-18, -3.6824091879428833e-17, -4.1856039571933684e-16, -2.5332967476060149e-15, -9.5704273448668635e-15, -2.4624483487141369e-14, -4.5764677963830528e-14, -6.4330718711342154e-14, -7.1180457809490043e-14, -6.4207368723954219e-14, -4.8361121832519087e-14, -2.9962899926871370e-14, -1.2449696760735098e-14], [1.3791521714035013e-20, 5.8820550402185851e-19, 8.1888812726448885e-18, 5.8914065825059737e-17, 2.5974411113581225e-16, 7.6979369711465525e-16, 1.6305728678893446e-15, 2.5869591393826813e-15, 3.1972610204615360e-15, 3.1815745539191332e-15, 2.6018350967845399e-15, 1.7146764809335897e-15, 7.3887005197943959e-16], [-1.6787671829759029e-22, -9.2108504262344723e-21, -1.5558046907331041e-19, -1.3194133460875348e-18, -6.7359706078368462e-18, -2.2823325567572547e-17, -5.4701657898684311e-17, -9.7262732129782136e-17, -1.3335937281701614e-16, -1.4546276873430881e-16, -1.2842805039446613e-16, -8.9627874139620027e-17, -3.9944624760720922e-17], [2.0058338063450909e-24, 1.4162571253283582e-22, 2.8777561610715670e-21, 2.8549903837645856e-20, 1.6758400541426561e-19, 6.4477211288086538e-19, 1.7370449604081721e-18, 3.4391541603938423e-18, 5.1988760114350838e-18, 6.1795732356076931e-18, 5.8598403976494252e-18, 4.3129798168575235e-18, 1.9830790536550626e-18], [-2.4306410385273574e-26, -2.1408832997920622e-24, -5.1915118061380648e-23, -5.9826941390426187e-22, -4.0109910029165109e-21, -1.7411923640210254e-20, -5.2399548373763728e-20, -1.1481846124622504e-19, -1.9023058537463983e-19, -2.4503660755827159e-19, -2.4833316005692176e-19, -1.9202070537828728e-19, -9.0871779522484562e-20]],
        [[9.1292910089740559e-2, 7.1495650664504269e-2, 4.3918739195005223e-2, 2.1237702372023780e-2, 8.1377572212587917e-3, 2.4986937277403246e-3, 6.2630453696808689e-4, 1.3203780518391136e-4, 2.4530259050940396e-5, 4.3027574927033506e-6, 7.8067465077038860e-7, 1.5979657833596206e-7, 3.3906542674808725e-8], [-1.8521341934828743e-3, -2.3471275251872950e-3, -2.5631384227473886e-3, -2.0764246081076286e-3, -1.2396549327763535e-3, -5.5863437897846814e-4, -1.9596554031731759e-4, -5.5566301390181945e-5, -1.3385196136757517e-5, -2.9311558049946212e-6, -6.3620937003621573e-7, -1.4827805052529476e-7, -3.3888312772715025e-8], [2.0486537170067539e-5, 4.7302805049599399e-5, 7.8256874538097830e-5, 8.7421135280781004e-5, 6.9667307825100319e-5, 4.1200622575672683e-5, 1.8700438712006367e-5, 6.7605278841856419e-6, 2.0410576746053734e-6, 5.4809981234146415e-7, 1.4162257087707886e-7, 3.7721614820366358e-8, 9.3393153158138727e-9], [-2.3918477573443529e-7, -9.1451021526779797e-7, -2.0857617656029111e-6, -3.0761459837672130e-6, -3.1645731407002193e-6, -2.3761489360023810e-6, -1.3515450105283709e-6, -6.0521062622928652e-7, -2.2347468233896797e-7, -7.2190761529893580e-8, -2.1904866936601486e-8, -6.6125867664827273e-9, -1.7666482972349210e-9], [2.8622209348496869e-9, 1.6701102155923597e-8, 5.0812057271804295e-8, 9.6424897858140054e-8, 1.2476574590476288e-7, 1.1603763197887229e-7, 8.0835918755032077e-8, 4.3902647532499387e-8, 1.9455610724741620e-8, 7.4376451396468065e-9, 2.6152468358282051e-9, 8.8623204150528539e-10, 2.5410204188891532e-10], [-3.4571417962067107e-11, -2.9140551587596070e-10, -1.1573756176135036e-9, -2.7679612171959195e-9, -4.4180163511665187e-9, -4.9977800174989749e-9, -4.1912701871977192e-9, -2.7161256831861632e-9, -1.4226646767494163e-9, -6.3475009872391450e-10, -2.5557689825253685e-10, -9.6333922522649960e-11, -2.9480021528952030e-11], [4.1622172946221488e-13, 4.9020146452365690e-12, 2.4969484488055549e-11, 7.4022280289037421e-11, 1.4353930996589235e-10, 1.9467112362227907e-10, 1.9382732544566980e-10, 1.4788906239118138e-10, 9.0393468501508082e-11, 4.6511649458178573e-11, 2.1219081785759571e-11, 8.8218218152801931e-12, 2.8664313451478589e-12], [-4.9960501562996098e-15, -7.9986859601307903e-14, -5.1465911602402784e-13, -1.8657399954591402e-12, -4.3406299932858473e-12, -6.9738114958728776e-12, -8.1488552659001101e-12, -7.2381426216285611e-12, -5.1063589516874681e-12, -2.9986820010922202e-12, -1.5354983703109494e-12, -6.9878877497276532e-13, -2.3993336787113391e-13], [5.9247997471664179e-17, 1.2711882191276753e-15, 1.0199040576536934e-14, 4.4696009752221021e-14, 1.2343083485067817e-13, 2.3253452295587663e-13, 3.1571784787662669e-13, 3.2328435622244459e-13, 2.6072344055172451e-13, 1.7313405204859693e-13, 9.8671066740282655e-14, 4.8815159612716375e-14, 1.7634711602796463e-14], [-7.0233942314061016e-19, -1.9739034850203857e-17, -1.9524548328232549e-16, -1.0240873074444199e-15, -3.3258738389769255e-15, -7.2817314448617482e-15, -1.1387579332719581e-14, -1.3326461632185056e-14, -1.2181834938692455e-14, -9.0720898647334160e-15, -5.7108160239541878e-15, -3.0522058007545615e-15, -1.1555082356492500e-15], [8.1401857428216522e-21, 3.0016129871224098e-19, 3.6242224387221775e-18, 2.2551205430119401e-17, 8.5421345404308596e-17, 2.1562932060253100e-16, 3.8538802316424449e-16, 5.1146218596754048e-16, 5.2586835027616820e-16, 4.3593237866154866e-16, 3.0102068551595840e-16, 1.7281914164587119e-16, 6.8316816148514510e-17], [-9.6406135981676992e-23, -4.4793165138207887e-21, -6.5422177565583715e-20, -4.7911595454987603e-19, -2.1010738868535268e-18, -6.0713091906938207e-18, -1.2314052419736832e-17, -1.8403392201179271e-17, -2.1134671311141201e-17, -1.9370059015889581e-17, -1.4580164730633774e-17, -8.9450931296247175e-18, -3.6801651215299247e-18], [1.0684848804206304e-24, 6.5684218212704726e-23, 1.1512943848825181e-21, 9.8517706992070611e-21, 4.9679948139136686e-20, 1.6326125776391632e-19, 3.7336223692371946e-19, 6.2433641960137847e-19, 7.9574533222543450e-19, 8.0130192160594902e-19, 6.5370218664681213e-19, 4.2654930948303690e-19, 1.8209303150532527e-19], [-1.3015247033618926e-26, -9.4786153990986959e-25, -1.9783781350362780e-23, -1.9649492380810370e-22, -1.1322507631197947e-21, -4.2057314190573250e-21, -1.0778993212277917e-20, -2.0045518553286839e-20, -2.8183511278053967e-20, -3.0997748143077087e-20, -2.7257577232535527e-20, -1.8831628929596005e-20, -8.3179745974298805e-21]],
        [[8.7743961970261505e-2, 6.7148005326119904e-2, 3.9347974481277656e-2, 1.7683416234290632e-2, 6.1157179509635654e-3, 1.6388767110520832e-3, 3.4477990863226029e-4, 5.8321081554283456e-5, 8.2739674788165559e-6, 1.0568266807507371e-6, 1.3557643503390894e-7, 1.9977771726690877e-8, 3.3658199737698121e-9], [-1.6989934850431329e-3, -2.0084637533967230e-3, -2.0249486728247989e-3, -1.5021408665562143e-3, -8.0595586068604614e-4, -3.1774708707894746e-4, -9.4293321428178168e-5, -2.1739147238146798e-5, -4.0751656703047044e-6, -6.6577179525217473e-7, -1.0502197859731846e-7, -1.8083488683781717e-8, -3.3399860313704136e-9], [1.7869912765839384e-5, 3.7758468361000330e-5, 5.7435340385805936e-5, 5.8207615061241858e-5, 4.1264098860395746e-5, 2.1199459722164906e-5, 8.1232973341165175e-6, 2.3969622271180235e-6, 5.6896553566908384e-7, 1.1591912807296129e-7, 2.2256208487164482e-8, 4.4842589900252980e-9, 9.1327810236855634e-10], [-1.9842190113856667e-7, -6.8821167753299693e-7, -1.4296991367022877e-6, -1.8949327926524707e-6, -1.7225377506167190e-6, -1.1192090110315414e-6, -5.3704231092492230e-7, -1.9692438602896547e-7, -5.7642709388053154e-8, -1.4324746456319198e-8, -3.2917582033565364e-9, -7.6764891297153836e-10, -1.7146678922364434e-10], [2.2603704017331623e-9, 1.1889308538656789e-8, 3.2656254930761725e-8, 5.5310021091746100e-8, 6.2920920528162369e-8, 5.0485665524078171e-8, 2.9657311337618156e-8, 1.3229058794542188e-8, 4.6812477534439963e-9, 1.3936338924813004e-9, 3.7742553323251062e-10, 1.0067829157194382e-10, 2.4490744379121684e-11], [-2.6067834501266934e-11, -1.9661849992994959e-10, -6.9977144539844056e-10, -1.4854215486793123e-9, -2.0760635291190464e-9, -2.0215173414285823e-9, -1.4296287308334687e-9, -7.6322333098941382e-10, -3.2138686739367444e-10, -1.1291928833335356e-10, -3.5556624959747948e-11, -1.0730420764228306e-11, -2.8230019386769596e-12], [2.9947839605448309e-13, 3.1395803602009054e-12, 1.4242609054440226e-11, 3.7300758813985505e-11, 6.3128136691714658e-11, 7.3576013594405473e-11, 6.1805963336601508e-11, 3.8971055428860481e-11, 1.9274902308071081e-11, 7.8916564890914549e-12, 2.8552677110617598e-12, 9.6518933390015681e-13, 2.7285136985313921e-13], [-3.4493032160518354e-15, -4.8697657754671465e-14, -2.7756052754389276e-13, -8.8543052983849787e-13, -1.7931456601206117e-12, -2.4731426196633014e-12, -2.4402046933240858e-12, -1.7971303223077282e-12, -1.0324366320162227e-12, -4.8718095679191503e-13, -2.0042527707902976e-13, -7.5214335693562287e-14, -2.2712762532952540e-14], [3.8923875756543189e-17, 7.3651397492487215e-16, 5.2108176356219352e-15, 2.0027129582812020e-14, 4.8043101792203251e-14, 7.7651026337137713e-14, 8.9130850299513895e-14, 7.5933788743569158e-14, 5.0179910052958988e-14, 2.7026475482538087e-14, 1.2525253567926854e-14, 5.1762800171369571e-15, 1.6608012632473207e-15], [-4.4860512778423169e-19, -1.0897266164820458e-17, -9.4650755811980379e-17, -4.3418400736638689e-16, -1.2229618545183836e-15, -2.2967312935830056e-15, -3.0410773841333973e-15, -2.9716278782411139e-15, -2.2395116560168077e-15, -1.3648295583752669e-15, -7.0659788768755745e-16, -3.1924668386017114e-16, -1.0830553980392684e-16], [4.8219307934464924e-21, 1.5800604435583079e-19, 1.6696883045420511e-18, 9.0644554333776508e-18, 2.9743922190763039e-17, 6.4414129629443967e-17, 9.7647684133548319e-17, 1.0861276463809878e-16, 9.2626521508792420e-17, 6.3376263047838086e-17, 3.6376813850608798e-17, 1.7849952290090091e-17, 6.3749469635891061e-18], [-5.8308596447953837e-23, -2.2511410107692320e-21, -2.8677346828899169e-20, -1.8289137928392737e-19, -6.9425086589069189e-19, -1.7219270785317017e-18, -2.9682475431265565e-18, -3.7322671743714540e-18, -3.5765352234341789e-18, -2.7278863980616988e-18, -1.7239720170867469e-18, -9.1326178055920607e-19, -3.4199277872595582e-19], [5.7978898681587202e-25, 3.1532040673130078e-23, 4.8081896896306114e-22, 3.5772092101815335e-21, 1.5607642819083433e-20, 4.4059465549924745e-20, 8.5827178961741669e-20, 1.2122907190885693e-19, 1.2969631544838647e-19, 1.0955408431566363e-19, 7.5751984113908517e-20, 4.3085726162785868e-20, 1.6856245490338702e-20], [-5.8363592336738979e-27, -4.3472560851721398e-25, -7.8807188936097013e-24, -6.7968224377489413e-23, -3.3881858084546624e-22, -1.0822517991479235e-21, -2.3684505295985528e-21, -3.7355737794675492e-21, -4.4345144100673327e-21, -4.1227557799853218e-21, -3.1003220835388067e-21, -1.8835097730303843e-21, -7.6720999435700612e-22]],
        [[8.4481803645586281e-2, 6.3409094714648368e-2, 3.5708868866960613e-2, 1.5082095442952676e-2, 4.7787549916557602e-3, 1.1384477888078696e-3, 2.0530501789436683e-4, 2.8476557744792540e-5, 3.1411256983660118e-6, 2.9411314238049342e-7, 2.6289308572304691e-8, 2.6795093449302535e-9, 3.4222931064241517e-10], [-1.5649808527192054e-3, -1.7364706586625276e-3, -1.6261638654511828e-3, -1.1143713556256707e-3, -5.4410483573626300e-4, -1.9069001980509593e-4, -4.8763193819541018e-5, -9.3159727353029660e-6, -1.3804257707000956e-6, -1.6920008463667563e-7, -1.9144806380740818e-8, -2.3503498788160365e-9, -3.3654712714572774e-10], [1.5689821716772439e-5, 3.0523634514686360e-5, 4.3005779295925447e-5, 3.9935109010062000e-5, 2.5490392231302414e-5, 1.1538157618724723e-5, 3.7915145002022623e-6, 9.2762151155605284e-7, 1.7528773793186000e-7, 2.7185855526709569e-8, 3.8275888460936459e-9, 5.6463263069212723e-10, 9.1131621732378841e-11], [-1.6606679250453180e-7, -5.2576762423208487e-7, -1.0029297437917285e-6, -1.2062892828527438e-6, -9.8005002800367422e-7, -5.5825963301120476e-7, -2.2917660844549566e-7, -6.9749704795700528e-8, -1.6346781855042924e-8, -3.1292235264210205e-9, -5.3722578515089142e-10, -9.3884157491008481e-11, -1.6952585465204904e-11], [1.8037340647650260e-9, 8.6123619861299509e-9, 2.1535065405545798e-8, 3.2866595846501644e-8, 3.3234503533083095e-8, 2.3286073570890067e-8, 1.1681278317144428e-8, 4.3294824027262376e-9, 1.2329328345803214e-9, 2.8570701602549136e-10, 5.8766855091547905e-11, 1.1992827840779031e-11, 2.4007812970982028e-12], [-1.9912277386478383e-11, -1.3529097412770208e-10, -4.3510885003424125e-10, -8.2757125728418353e-10, -1.0235007236360530e-9, -8.6758642809314372e-10, -5.2330987524121655e-10, -2.3244997351120776e-10, -7.9162165956248622e-11, -2.1858835268131642e-11, -5.3062954570964284e-12, -1.2481278980192506e-12, -2.7457289093450393e-13], [2.1814654062672560e-13, 2.0547209076869788e-12, 8.3724844582572868e-12, 1.9551717319569911e-11, 2.9171069441248847e-11, 2.9525968012108226e-11, 2.1139834720160971e-11, 1.1109121294485485e-11, 4.4653950306276272e-12, 1.4499111362203239e-12, 4.1002075626322435e-13, 1.0987215355199922e-13, 2.6347923785825067e-14], [-2.4294731880815129e-15, -3.0356263825668529e-14, -1.5455733378848128e-13, -4.3783588883781501e-13, -7.7930231618372683e-13, -9.3172345383787885e-13, -7.8338506854123169e-13, -4.8177637853856138e-13, -2.2603907019307576e-13, -8.5325329552278636e-14, -2.7790013172541621e-14, -8.3959273702162990e-15, -2.1787880753343354e-15], [2.5696180499083967e-17, 4.3763829819732915e-16, 2.7540254531468015e-15, 9.3651569944031969e-15, 1.9694608204779849e-14, 2.7556842165928750e-14, 2.6959143997650663e-14, 1.9221919234972108e-14, 1.0425248535735920e-14, 4.5293798770605311e-15, 1.6819062125186720e-15, 5.6759310149120632e-16, 1.5834799013923048e-16], [-2.9960653446105585e-19, -6.1821403236213260e-18, -4.7537812429265583e-17, -1.9237786400908252e-16, -4.7406459023102152e-16, -7.7004050073521995e-16, -8.6950024233441945e-16, -7.1284115533556725e-16, -4.4310565515980234e-16, -2.1960192037500309e-16, -9.2132703626039831e-17, -3.4440364178629117e-17, -1.0268263102870582e-17], [2.8020086698206559e-21, 8.5589829893951760e-20, 7.9833538330690252e-19, 3.8126987674032363e-18, 1.0927034795324886e-17, 2.0456762954823407e-17, 2.6469066110680236e-17, 2.4767428635525909e-17, 1.7509398397511374e-17, 9.8192184621778810e-18, 4.6164781519285058e-18, 1.8971243477174250e-18, 6.0124986268995933e-19], [-3.3986116796999288e-23, -1.1655643900995035e-21, -1.3064419790226582e-20, -7.3142096853989212e-20, -2.4219315263911974e-19, -5.1920271829256086e-19, -7.6480529768920298e-19, -8.1133286122409871e-19, -6.4777120139174146e-19, -4.0805535448408111e-19, -2.1338835303735325e-19, -9.5741896810577810e-20, -3.2098867211760573e-20], [5.2517873831896709e-25, 1.5659651008271528e-23, 2.0888251171850487e-22, 1.3621414564089026e-21, 5.1797492360227036e-21, 1.2640059484356961e-20, 2.1070942996376255e-20, 2.5186588127907888e-20, 2.2564881301328188e-20, 1.5859924381680368e-20, 9.1623312458658445e-21, 4.4602872343847913e-21, 1.5749764882232686e-21], [4.8192076172026769e-27, -2.0518900416162318e-25, -3.2748572431966516e-24, -2.4683600441276995e-23, -1.0715626848970861e-22, -2.9600092147042188e-22, -5.5526901417235646e-22, -7.4352906170535667e-22, -7.4293390262679801e-22, -5.7890707679029022e-22, -3.6707101995205219e-22, -1.9273465713460220e-22, -7.1384729486377791e-23]],
        [[8.1471377438425170e-2, 6.0161891468798402e-2, 3.2766215411120252e-2, 1.3132568805471317e-2, 3.8627179684326523e-3, 8.3189520421445151e-4, 1.3121430887076916e-4, 1.5261343110462654e-5, 1.3374403007103607e-6, 9.3080899833465579e-8, 5.7615408324959085e-9, 3.9113940311739624e-10, 3.5853923114983966e-11], [-1.4469713963425765e-3, -1.5153654283492631e-3, -1.3249977963840739e-3, -8.4496339681686006e-4, -3.7952514837123886e-4, -1.1995374376152011e-4, -2.6901582541389017e-5, -4.3431482844450887e-6, -5.1837200212270867e-7, -4.8240611997782860e-8, -3.8933313094470194e-9, -3.2960405485927182e-10, -3.4851645470406722e-11], [1.3857898589416322e-5, 2.4959870469265177e-5, 3.2782552927707592e-5, 2.8141137800660699e-5, 1.6350437612484689e-5, 6.6060768005991222e-6, 1.8898679929760842e-6, 3.8969242721587670e-7, 5.9522266260182070e-8, 7.0894148966660019e-9, 7.2694476819940193e-10, 7.6120886857014883e-11, 9.3217529215880447e-12], [-1.4013012621014446e-7, -4.0719997272498067e-7, -7.1837890214457708e-7, -7.9097137840408223e-7, -5.8033267288237659e-7, -2.9335191634222021e-7, -1.0445307803778259e-7, -2.6767743268585074e-8, -5.0869038584681092e-9, -7.5476500961643922e-10, -9.6019726428789153e-11, -1.2212587801125144e-11, -1.7141865233155301e-12], [1.4527741695945099e-9, 6.3382121425666326e-9, 1.4537227036040683e-8, 2.0165817609174392e-8, 1.8308752523232803e-8, 1.1331212198494491e-8, 4.9151745699367929e-9, 1.5328865988782221e-9, 3.5500484885250542e-10, 6.4288502367221435e-11, 9.9496487088780027e-12, 1.5107992984815920e-12, 2.4021120390508968e-13], [-1.5409402248492121e-11, -9.4779156177299038e-11, -2.7752778727907519e-10, -4.7706243629011039e-10, -5.2722387404699762e-10, -3.9328239639516803e-10, -2.0465720006569891e-10, -7.6481619877947277e-11, -2.1246174860803003e-11, -4.6200788002498045e-12, -8.5570519069823577e-13, -1.5276811690965300e-13, -2.7209759225828186e-14], [1.6015139433015945e-13, 1.3715385916706515e-12, 5.0596083337691012e-12, 1.0625096057234513e-11, 1.4107341252054182e-11, 1.2527137507647405e-11, 7.7250119110840830e-12, 3.4163788454151808e-12, 1.1237498013474698e-12, 2.8948408782489750e-13, 6.3272692411823041e-14, 1.3103514255017047e-14, 2.5882703258434426e-15], [-1.7605649974994790e-15, -1.9340468438225510e-14, -8.8616888449306943e-14, -2.2483240744094157e-13, -3.5493800515515729e-13, -3.7140139869263989e-13, -2.6865364713401250e-13, -1.3914253772817597e-13, -5.3603397034065933e-14, -1.6169417513830862e-14, -4.1201218590973981e-15, -9.7807904581257550e-16, -2.1232642564082196e-16], [1.6644971041886451e-17, 2.6611271829584100e-16, 1.5019118347826680e-15, 4.5555951333272211e-15, 8.4716263238423464e-15, 1.0353990912933837e-14, 8.7086141724431963e-15, 5.2348142038973947e-15, 2.3395749548993467e-15, 8.1803962475939126e-16, 2.4040227659410636e-16, 6.4727755955599610e-17, 1.5318628597285701e-17], [-2.0856623675131137e-19, -3.5959883322821230e-18, -2.4665707318582043e-17, -8.8786720564101298e-17, -1.9302928606288218e-16, -2.7347971454444685e-16, -2.6541735695472853e-16, -1.8370450644129823e-16, -9.4451131732083801e-17, -3.7936207151342785e-17, -1.2734618263836899e-17, -3.8521026737659520e-18, -9.8669301034422879e-19], [2.0178741505603507e-21, 4.7680554883726891e-20, 3.9487814433748997e-19, 1.6725911818027757e-18, 4.2205942293714766e-18, 6.8842921648895663e-18, 7.6567699969340890e-18, 6.0587946121634704e-18, 3.5566718364144189e-18, 1.6276505982039150e-18, 6.1870833909344568e-19, 2.0846548720882957e-19, 5.7418048459711888e-20], [3.3761841444103862e-24, -6.1721111902533259e-22, -6.1791839481724358e-21, -3.0557516884940099e-20, -8.8912043390729625e-20, -1.6593556831377091e-19, -2.1018868898489077e-19, -1.8892879235391606e-19, -1.2575987743604972e-19, -6.5089041495675034e-20, -2.7796474881247023e-20, -1.0351366420752603e-20, -3.0478746886845755e-21], [1.1534644706579037e-24, 8.0955465383945598e-24, 9.3782014945057000e-23, 5.4192247810175335e-22, 1.8100419838921637e-21, 3.8441275270651105e-21, 5.5143469076003563e-21, 5.5971071860719180e-21, 4.1981203640920343e-21, 2.4406788123586237e-21, 1.1625246565910700e-21, 4.7510997062103139e-22, 1.4875764186918198e-22], [1.8423818267832973e-26, -9.9065715949729820e-26, -1.4208715824071945e-24, -9.3868388213038167e-24, -3.5710656938006977e-23, -8.5826879685993097e-23, -1.3867752608434822e-22, -1.5805957852485900e-22, -1.3278642765768721e-22, -8.6155071793186682e-23, -4.5455813432115079e-23, -2.0251632881478202e-23, -6.7093365045588526e-24]],
        [[7.8683237188363805e-2, 5.7316494745094838e-2, 3.0353719569401266e-2, 1.1641158886073152e-2, 3.2154717656246312e-3, 6.3552804546155585e-4, 8.9334168672897407e-5, 8.9080006419496676e-6, 6.3519645608375314e-7, 3.3528932349117437e-8, 1.4426513914530913e-9, 6.3181377706274698e-11, 3.9012022341600652e-12], [-1.3424614437048843e-3, -1.3336413629747588e-3, -1.0936482367966934e-3, -6.5296047890488304e-4, -2.7229428979351333e-4, -7.8610763631659415e-5, -1.5715825993994338e-5, -2.1862463378563209e-6, -2.1460826997087797e-7, -1.5430780278068746e-8, -8.9101466306309811e-10, -5.0577204602254557e-11, -3.7348684912918620e-12], [1.2306266297574573e-5, 2.0624713788540457e-5, 2.5393692498618917e-5, 2.0310209766852813e-5, 1.0847642591532990e-5, 3.9587377699518212e-6, 1.0000094231975005e-6, 1.7664717273481237e-7, 2.2184471812229289e-8, 2.0568997719335667e-9, 1.5368050385701849e-10, 1.1122424346554694e-11, 9.8328619311825772e-13], [-1.1915816735440697e-7, -3.1933297846715137e-7, -5.2434544366613004e-7, -5.3267095289264334e-7, -3.5625248653141741e-7, -1.6160476811338916e-7, -5.0568429960933258e-8, -1.1072275465059731e-8, -1.7313029832273566e-9, -2.0123026053215659e-10, -1.8935186122144914e-11, -1.7080085099067725e-12, -1.7819555229874239e-13], [1.1793132282580031e-9, 4.7324436499622002e-9, 1.0024938593890950e-8, 1.2738767866852596e-8, 1.0479813121594631e-8, 5.7905644518188623e-9, 2.1984772331489619e-9, 5.8451513426108268e-10, 1.1146833404681720e-10, 1.5902817029898144e-11, 1.8447541613044794e-12, 2.0322422783526310e-13, 2.4642799145273962e-14], [-1.2103483924224032e-11, -6.7506019447823479e-11, -1.8116488500972316e-10, -2.8368012381024306e-10, -2.8269414592942153e-10, -1.8748065979811082e-10, -8.5124603166367453e-11, -2.7079684979281739e-11, -6.2017175897065783e-12, -1.0683192877048175e-12, -1.5013300403178915e-13, -1.9847494185015650e-14, -2.7582895409038451e-15], [1.1730191767189859e-13, 9.3210985203917471e-13, 3.1367030806865840e-12, 5.9689895031209277e-12, 7.1141776077005598e-12, 5.5961810337696032e-12, 3.0034807321153448e-12, 1.1296596616612349e-12, 3.0680908547323518e-13, 6.2955494654477715e-14, 1.0561452178342074e-14, 1.6501549061667908e-15, 2.5956243106221524e-16], [-1.3310728629862161e-15, -1.2575010068154184e-14, -5.2176796478445293e-14, -1.1951605947623562e-13, -1.6880240079095101e-13, -1.5603192436424911e-13, -9.8047275779374878e-14, -4.3169958318428824e-14, -1.3758067098417360e-14, -3.3241397605577731e-15, -6.5728750562842420e-16, -1.1976177498374876e-16, -2.1085871378091147e-17], [1.0799347005807763e-17, 1.6536317012089325e-16, 8.4310055717739017e-16, 2.2982212203021146e-15, 3.8103787124302441e-15, 4.1036624939613098e-15, 2.9940735555661125e-15, 1.5300347261590311e-15, 5.6694886879260315e-16, 1.5967530193470016e-16, 3.6798679782191946e-17, 7.7269290340275262e-18, 1.5078114446982048e-18], [-1.0511238897375212e-19, -2.1335819831105418e-18, -1.3208701134284580e-17, -4.2572350194110894e-17, -8.2287252833677489e-17, -1.0252554054268506e-16, -8.6228995523615596e-17, -5.0758193424986815e-17, -2.1691405530363948e-17, -7.0575729905255175e-18, -1.8768167963757397e-18, -4.4936909810004256e-19, -9.6335520764557085e-20], [3.7228737025184695e-21, 2.7531025857262051e-20, 2.0049251743418573e-19, 7.6201207091246257e-19, 1.7079454865395496e-18, 2.4467981912208482e-18, 2.3569968845952371e-18, 1.5874157541798591e-18, 7.7667718899148168e-19, 2.8957954151335250e-19, 8.8060759652857403e-20, 2.3813427884073468e-20, 5.5645179073374541e-21], [8.0749092271391635e-23, -3.2818950404063375e-22, -3.0556371991978475e-21, -1.3322625287349988e-20, -3.4249438690044757e-20, -5.6039345717405553e-20, -6.1458593766521608e-20, -4.7066909001125170e-20, -2.6190687610496216e-20, -1.1107872095230899e-20, -3.8310654657845661e-21, -1.1599980755190405e-21, -2.9336885202960122e-22], [1.9345751555683642e-24, 4.3492858242812734e-24, 4.3079823520002326e-23, 2.2432259498585369e-22, 6.6384092818101780e-22, 1.2357093492114198e-21, 1.5349030384087720e-21, 1.3291543105462574e-21, 8.3605747585882720e-22, 4.0061927213961343e-22, 1.5553075341604575e-22, 5.2315054753782204e-23, 1.4228774035124939e-23], [1.5314889266753207e-27, -5.2063819581653374e-26, -6.3250182762049410e-25, -3.7190270944711715e-24, -1.2499749556422705e-23, -2.6310569919308357e-23, -3.6822527154517439e-23, -3.5862580814099459e-23, -2.5351597054764527e-23, -1.3636496857380710e-23, -5.9164517480629527e-24, -2.1943660195298361e-24, -6.3804966168061621e-25]],
        [[7.6092451310620474e-2, 5.4802920700095229e-2, 2.8351406125948927e-2, 1.0479668440700650e-2, 2.7458892294114649e-3, 5.0478530404467581e-4, 6.4331411887328301e-5, 5.6180190494612022e-6, 3.3416817794618968e-7, 1.3718992264015503e-8, 4.1620581008067664e-10, 1.1503814218479762e-11, 4.4563237836141638e-13], [-1.2494275958516988e-3, -1.1827796768716546e-3, -9.1319155262171102e-4, -5.1296778498551403e-4, -2.0013926359444951e-4, -5.3366840758832401e-5, -9.6529469379621570e-6, -1.1788406700825635e-6, -9.7270131025540357e-8, -5.5229495419963118e-9, -2.3094702943299382e-10, -8.6225556142045607e-12, -4.1801897906946707e-13], [1.0982056536114554e-5, 1.7206112849777675e-5, 1.9956385428827502e-5, 1.4976279445307727e-5, 7.4182846647629991e-6, 2.4717762131352095e-6, 5.5859604122390776e-7, 8.5869289350518960e-8, 9.0269137293295405e-9, 6.6290851557137767e-10, 3.6381949857105180e-11, 1.7847849234941688e-12, 1.0780114923795004e-13], [-1.0208475380960304e-7, -2.5330916758656219e-7, -3.8928955241272370e-7, -3.6746047910457600e-7, -2.2591970600956082e-7, -9.2911556948150740e-8, -2.5866065113257230e-8, -4.9091447416215914e-9, -6.4160386981063240e-10, -5.9255334419895210e-11, -4.1441966923401613e-12, -2.5984944469030546e-13, -1.9172573840818359e-14], [9.6256850062083129e-10, 3.5803242459709314e-9, 7.0501863803780713e-9, 8.2642839820171311e-9, 6.2115905842141831e-9, 3.0944955839760067e-9, 1.0402384968541457e-9, 2.3888267194316584e-10, 3.8030761860217589e-11, 4.3241106345316221e-12, 3.7675764801325735e-13, 2.9498051748238981e-14, 2.6072256577531797e-15], [-9.6986952750087843e-12, -4.8826642722445833e-11, -1.2075670182407819e-10, -1.7350246535196776e-10, -1.5722280010926211e-10, -9.3597934619688850e-11, -3.7486651540783469e-11, -1.0273531571200299e-11, -1.9631814240741290e-12, -2.7039221834735496e-13, -2.8824983821432029e-14, -2.7632058818430993e-15, -2.8748430819684995e-16], [8.4554080757106805e-14, 6.4391351996115056e-13, 1.9916488159911738e-12, 3.4578658414167338e-12, 3.7287551646022986e-12, 2.6219906516700303e-12, 1.2372813414433430e-12, 4.0010900663794622e-13, 9.0672134406478636e-14, 1.4927947079969428e-14, 1.9179080028611200e-15, 2.2134237481033403e-16, 2.6692097411942037e-17], [-1.0087761715121681e-15, -8.3247280157030767e-15, -3.1488791205211780e-14, -6.5593614206074983e-14, -8.3550757261964662e-14, -6.8828052107172026e-14, -3.7933696563297219e-14, -1.4340465857810840e-14, -3.8153467649445761e-15, -7.4242166718777641e-16, -1.1347343619409976e-16, -1.5536192583581317e-17, -2.1423399347335617e-18], [1.0787039823145450e-17, 1.0539028594943330e-16, 4.8433030419842853e-16, 1.1974715929149505e-15, 1.7855081623307100e-15, 1.7092847414635667e-15, 1.0916527600253443e-15, 4.7855339523292147e-16, 1.4817442076228612e-16, 3.3744599580129040e-17, 6.0661443974420423e-18, 9.7261908050506564e-19, 1.5153409238045906e-19], [1.3982157906452188e-19, -1.2685107468965389e-18, -7.3688825336775348e-18, -2.1225992657143555e-17, -3.6639721231224281e-17, -4.0440945656143354e-17, -2.9718416921318178e-17, -1.4998884655933693e-17, -5.3629608351667650e-18, -1.4169303795224939e-18, -2.9655401704540656e-19, -5.5040667296555626e-20, -9.5864979960666697e-21], [9.0054595149272684e-21, 1.6826720944705283e-20, 1.0205577488346835e-19, 3.5756437973175710e-19, 7.2103068641565811e-19, 9.1526163608469293e-19, 7.6975488784406283e-19, 4.4448371136080068e-19, 1.8225818721087546e-19, 5.5426316189501650e-20, 1.3382192120156319e-20, 2.8452963805581395e-21, 5.4878049503032273e-22], [1.4260940230377658e-22, -1.7603945290814343e-22, -1.5903955062853141e-21, -6.0586740918884709e-21, -1.3806767747598784e-20, -1.9937629157953930e-20, -1.9066597581606660e-20, -1.2521683872978215e-20, -5.8507965868056533e-21, -2.0332897511122770e-21, -5.6159901495153771e-22, -1.3550006265862409e-22, -2.8696069823141154e-23], [-2.6059073370889860e-25, 2.1069624217355775e-24, 2.1316501421261915e-23, 9.7288618251136747e-23, 2.5512947173255038e-22, 4.1870360456234751e-22, 4.5327557703319121e-22, 3.3678658181869846e-22, 1.7827644457718675e-22, 7.0331765412343484e-23, 2.2052028106937723e-23, 5.9858848944653097e-24, 1.3813778368578155e-24], [-1.0293955829283639e-25, -3.8265332276763135e-26, -2.4110764428697635e-25, -1.4913287610693181e-24, -4.5669853620932701e-24, -8.5004778799289733e-24, -1.0371093711952806e-23, -8.6743707646937511e-24, -5.1730450257728267e-24, -2.3020885154344734e-24, -8.1338516914124728e-25, -2.4637746744011075e-25, -6.1519023843533872e-26]],
        [[7.3677748869597455e-2, 5.2566026210340423e-2, 2.6671123529044036e-2, 9.5610092337405900e-3, 2.3974248601700987e-3, 4.1480779644657078e-4, 4.8679198286805800e-5, 3.7981017890187184e-6, 1.9319036299386204e-7, 6.3465176134280696e-9, 1.3905602879107671e-10, 2.4070569244952229e-12, 5.4232250861725074e-14], [-1.1662234633283806e-3, -1.0563848945435574e-3, -7.7047676439482932e-4, -4.0878500841450211e-4, -1.5015849417518521e-4, -3.7333592899125775e-5, -6.1908451691780229e-6, -6.7534562273203329e-7, -4.7871136705948236e-8, -2.2001961810108209e-9, -6.8009909756926117e-11, -1.6586488139472727e-12, -4.9468188427876006e-14], [9.8433777166887398e-6, 1.4480407142410674e-5, 1.5889692417513250e-5, 1.1258682713624056e-5, 5.2136198858500082e-6, 1.6016539295425298e-6, 3.2771151743877947e-7, 4.4491880136614191e-8, 3.9857323827466620e-9, 2.3646048130801809e-10, 9.6783102456961953e-12, 3.1878501865601798e-13, 1.2411343324482303e-14], [-8.8134006037108534e-8, -2.0306947196373331e-7, -2.9348168463559796e-7, -2.5903798771125758e-7, -1.4752071711207986e-7, -5.5515310892241574e-8, -1.3907663682366879e-8, -2.3197997156096918e-9, -2.5754055835644017e-10, -1.9220524438918217e-11, -1.0104370780553611e-12, -4.3523391917900501e-14, -2.1539057560359173e-15], [7.8683097892397409e-10, 2.7412564191669216e-9, 5.0497350595546551e-9, 5.4950601888359072e-9, 3.8013787483105005e-9, 1.7227472148360781e-9, 5.1828603185766373e-10, 1.0411398722806827e-10, 1.4037159901514316e-11, 1.2901603588923665e-12, 8.5105094189488802e-14, 4.6709115333818376e-15, 2.8663989837995637e-16], [-7.9619172038087590e-12, -3.5826633449472786e-11, -8.2006055084184741e-11, -1.0884199221540993e-10, -9.0394993644138180e-11, -4.8744992722112079e-11, -1.7400844649407982e-11, -4.1573457493839666e-12, -6.7145929074196393e-13, -7.4832732101684125e-14, -6.0826606574134383e-15, -4.1638803213450784e-16, -3.1008770485473197e-17], [6.2459274855790531e-14, 4.5201671040542747e-13, 1.2919685783099377e-12, 2.0598583004091719e-12, 2.0246795994638448e-12, 1.2836348507002551e-12, 5.3781935160073527e-13, 1.5117804446535106e-13, 2.8916796395634457e-14, 3.8580010337669115e-15, 3.8063288190720951e-16, 3.1915729789913839e-17, 2.8307725099313512e-18], [-5.0243930541234898e-16, -5.5666564015708532e-15, -1.9567188946547333e-14, -3.7189354988212472e-14, -4.2955267576387384e-14, -3.1776196083330279e-14, -1.5500000943716191e-14, -5.0819309545131621e-15, -1.1403240451047448e-15, -1.8017042968468172e-16, -2.1299322562605157e-17, -2.1534940266348941e-18, -2.2380139977626084e-19], [2.3605490226583586e-17, 7.0191531886954114e-17, 2.7814430916615605e-16, 6.3730572788164035e-16, 8.6672003426230433e-16, 7.4511884435441352e-16, 4.2050743400028379e-16, 1.5964451955534386e-16, 4.1681438701228944e-17, 7.7259564288908203e-18, 1.0820782576683906e-18, 1.3011036569288893e-19, 1.5617847263753721e-20], [5.9673412906574167e-19, -7.2764716523064756e-19, -4.4193899578948373e-18, -1.1111296523230134e-17, -1.7045926795390698e-17, -1.6741199407674875e-17, -1.0830532925918866e-17, -4.7263455343369167e-18, -1.4251965112323562e-18, -3.0731786956451317e-19, -5.0481288309963187e-20, -7.1301859338491063e-21, -9.7610255523726913e-22], [1.2371326403712674e-20, 1.0606464688642466e-20, 5.1412384654010822e-20, 1.7181296862687902e-19, 3.1634760932537410e-19, 3.5911562451456720e-19, 2.6585725485279215e-19, 1.3266708136143793e-19, 4.5906764783682194e-20, 1.1429091841326937e-20, 2.1818398440718120e-21, 3.5799854630142074e-22, 5.5267191116655052e-23], [-6.5573998567027246e-23, -1.2254223807008761e-22, -7.5807427795267156e-22, -2.7749040768598446e-21, -5.7728180131529695e-21, -7.4424455980737825e-21, -6.2568056278539043e-21, -3.5493945117879413e-21, -1.4008835721386165e-21, -3.9989846939225863e-22, -8.7983698012042592e-23, -1.6602054869294576e-23, -2.8613214461179286e-24], [-9.7769418013337092e-24, 1.1308709872075063e-25, 1.5355207426407384e-23, 4.7551026071552277e-23, 1.0380454300407736e-22, 1.4939369258428210e-22, 1.4166844689271871e-22, 9.0879559573177699e-23, 4.0684983210373603e-23, 1.3231777915599804e-23, 3.3294253484712796e-24, 7.1584710199970634e-25, 1.3649565191248334e-25], [-2.5640613651634247e-25, -3.8847694753240668e-26, -1.0967793771122488e-26, -5.5226446767155590e-25, -1.7166562510341076e-24, -2.8819350118579237e-24, -3.0902003904902676e-24, -2.2329645788430723e-24, -1.1280201144345652e-24, -4.1541444267447415e-25, -1.1866772080367796e-25, -2.8818777532540730e-26, -6.0287539542617460e-27]],
        [[7.1420843289238907e-2, 5.0561875723418884e-2, 2.5247028984906647e-2, 8.8246212381240755e-3, 2.1338600214467736e-3, 3.5113222332227256e-4, 3.8475265187980529e-5, 2.7316992368364462e-6, 1.2169669015347308e-7, 3.2965469286793095e-9, 5.3863737224367882e-11, 5.8964258828187111e-13, 7.1743714964895076e-15], [-1.0915044453473466e-3, -9.4959422286087031e-4, -6.5618737910543961e-4, -3.2980430691987113e-4, -1.1461862587722124e-4, -2.6781053683027285e-5, -4.1182755324274290e-6, -4.0768439875813596e-7, -2.5349419701121634e-8, -9.6808457335519184e-10, -2.2737511119272368e-11, -3.6513113647610630e-13, -6.2918365881913120e-15], [8.8563056264378000e-6, 1.2284863405855677e-5, 1.2803550775509214e-5, 8.6137407325231411e-6, 3.7561992895491880e-6, 1.0733806257231604e-6, 2.0101608071182892e-7, 2.4432997369203847e-8, 1.8975477645009232e-9, 9.2865613995848703e-11, 2.8945148532232696e-12, 6.4173213767047669e-14, 1.5210913134815133e-15], [-7.6740132331211922e-8, -1.6440091232549547e-7, -2.2429210470309149e-7, -1.8616258039426091e-7, -9.8880714762497092e-8, -3.4336999821752975e-8, -7.8220954442477343e-9, -1.1617148879516137e-9, -1.1131902759645519e-10, -6.8385148152947867e-12, -2.7480519556995523e-13, -8.1178430672004989e-15, -2.5555885298653601e-16], [6.4198016321731240e-10, 2.1218014256496721e-9, 3.6799293442947267e-9, 3.7387380957414093e-9, 2.3960531866056657e-9, 9.9572889590648638e-10, 2.7075135394452895e-10, 4.8152818691141930e-11, 5.5776120345510803e-12, 4.2104445333434512e-13, 2.1304869950817029e-14, 8.1544166651031272e-16, 3.3066274426023451e-17], [-6.5234140151259019e-12, -2.6616356963892973e-11, -5.6701806397134789e-11, -6.9923927822111847e-11, -5.3592144816470695e-11, -2.6391777022069412e-11, -8.4789321209878782e-12, -1.7862830617399301e-12, -2.4707706833802858e-13, -2.2592499948959275e-14, -1.4143522732273361e-15, -6.8588611794071528e-17, -3.4904530314609154e-18], [6.2794678711857754e-14, 3.2418002377989712e-13, 8.4729408042557577e-13, 1.2521902480991233e-12, 1.1328862005266994e-12, 6.5370573329831475e-13, 2.4560761802767655e-13, 6.0674396345388982e-14, 9.9147175221116025e-15, 1.0849239971813019e-15, 8.2807068339004208e-17, 4.9930637378190234e-18, 3.1185742608192794e-19], [6.7622682158365856e-16, -3.6685118719952480e-15, -1.2867432996731384e-14, -2.2071494536812998e-14, -2.3016885521318104e-14, -1.5335989364499481e-14, -6.6682985586944240e-15, -1.9142194545490689e-15, -3.6617076534897066e-16, -4.7460427348676858e-17, -4.3615242521065548e-18, -3.2172770859406814e-19, -2.4191412798709538e-20], [5.1677239344757723e-17, 5.0295877810680191e-17, 1.5001387507163150e-16, 3.3706175642310535e-16, 4.3097172094734973e-16, 3.3797808772090385e-16, 1.7040837192116448e-16, 5.6596532983589457e-17, 1.2585714161343022e-17, 1.9154378206264178e-18, 2.0963449742529268e-19, 1.8648943050811262e-20, 1.6599290546158273e-21], [8.4605027198541765e-19, -4.1666884628346863e-19, -2.8106233941828216e-18, -6.0925649316000383e-18, -8.2704384459813436e-18, -7.2530807035960321e-18, -4.1601904623473747e-18, -1.5832100479763483e-18, -4.0618974575375473e-19, -7.2006033821610309e-20, -9.2937262893081607e-21, -9.8440705911720068e-22, -1.0219229289060622e-22], [-5.7601373767230239e-21, 4.6443675401317920e-21, 3.4583940610431894e-20, 9.2011085035168609e-20, 1.4680193056562946e-19, 1.4797062475508419e-19, 9.6874075101041797e-20, 4.2093821629414410e-20, 1.2388576767753826e-20, 2.5399996678176606e-21, 3.8320178836756509e-22, 4.7774373326845342e-23, 5.7084237782620681e-24], [-8.6643419387868051e-22, -1.6288954776878094e-22, 6.3922011362468246e-24, -9.9207629741699816e-22, -2.3845768448276916e-21, -2.8818729803269455e-21, -2.1623513953982461e-21, -1.0690299940469015e-21, -3.5897968129220472e-22, -8.4570940905671617e-23, -1.4792926650103550e-23, -2.1480231243883867e-24, -2.9195825710260810e-25], [-2.2924170842769655e-23, -1.6678288838688185e-24, 1.6768607650834023e-23, 2.9570542293555600e-23, 4.6229926098258666e-23, 5.6350765784713547e-23, 4.6779713937833626e-23, 2.6059742096073385e-23, 9.9262284059707928e-24, 2.6706280801922732e-24, 5.3754611817096433e-25, 9.0038946051598731e-26, 1.3774652798676592e-26], [-1.6884714016061894e-25, -2.3215711576192372e-26, 1.6069103682752950e-26, -2.2299484851782864e-25, -6.7510933645775685e-25, -1.0243570690080750e-24, -9.7163742679561095e-25, -6.1050099830806103e-25, -2.6265052339313371e-25, -8.0239174300270301e-26, -1.8451077720103465e-26, -3.5325179938117038e-27, -6.0234777157854431e-28]],
        [[6.9305885805614719e-2, 4.8755101298243027e-2, 2.4029213435863175e-2, 8.2275022398808654e-3, 1.9313266828423805e-3, 3.0502018413414474e-4, 3.1594233536077651e-5, 2.0753810445144414e-6, 8.2815472420636859e-8, 1.9063126958992976e-9, 2.4118201446573805e-11, 1.7176257982802350e-13, 1.0602729875538695e-15], [-1.0241722449026079e-3, -8.5866730051285543e-4, -5.6360363401393044e-4, -2.6890988639287037e-4, -8.8736426772702792e-5, -1.9606568883213949e-5, -2.8230458775116318e-6, -2.5716384204001475e-7, -1.4301294249089309e-8, -4.6585931641147091e-10, -8.5872910257112923e-12, -9.2975211570179904e-14, -8.7872068598137672e-16], [7.9930403316615221e-6, 1.0499460019526685e-5, 1.0431160879220651e-5, 6.6973215595594153e-6, 2.7685281379350709e-6, 7.4191727574861253e-7, 1.2843424895930316e-7, 1.4150230311819379e-8, 9.6810551902171524e-10, 3.9905470607641984e-11, 9.7086865951635382e-13, 1.4706513342725257e-14, 2.0193908788885143e-16], [-6.7420184380620320e-8, -1.3431979591324592e-7, -1.7349449316336119e-7, -1.3608829589667870e-7, -6.7835568065635585e-8, -2.1902332899273840e-8, -4.5803686450771356e-9, -6.1307316207143821e-10, -5.1492586456651564e-11, -2.6540612180838907e-12, -8.3251462511636600e-14, -1.7022760384084805e-15, -3.2494139223331526e-17], [5.2918864314053292e-10, 1.6598418904151699e-9, 2.7225027487944748e-9, 2.5962530152739241e-9, 1.5509203739060165e-9, 5.9542427267001637e-10, 1.4767660068706105e-10, 2.3517760612473224e-11, 2.3733665976940602e-12, 1.4964166146094749e-13, 5.9089531939440808e-15, 1.5841223777311717e-16, 4.0521948842992520e-18], [-4.5779276433429365e-12, -1.9899739706788748e-11, -4.0231428474172043e-11, -4.6247512859005465e-11, -3.2817172565326176e-11, -1.4839390422154841e-11, -4.3243190138671814e-12, -8.1159726640516499e-13, -9.7374038009841922e-14, -7.4148478093956377e-15, -3.6258453882746501e-16, -1.2461418911741561e-17, -4.1438446278332188e-19], [1.0861174236293027e-13, 2.4190619912860977e-13, 5.4097706792639015e-13, 7.5690451820109036e-13, 6.4379270515246608e-13, 3.4337104943011758e-13, 1.1714425033736682e-13, 2.5738429769742417e-14, 3.6390335712664555e-15, 3.3104720468327385e-16, 1.9772350443881815e-17, 8.5489123906155390e-19, 3.6017112378870687e-20], [2.6781062521046725e-15, -2.2787359545950713e-15, -9.4043126405596432e-15, -1.4146580123640577e-14, -1.3026959000299626e-14, -7.7632597344426518e-15, -3.0164699928973367e-15, -7.6394850539142611e-16, -1.2589299530882230e-16, -1.3542277216347530e-17, -9.7614189897613894e-19, -5.2239312366776310e-20, -2.7273458336389022e-21], [6.5745661093313021e-17, 3.6678995538441510e-17, 7.5926109272572315e-17, 1.7695445959329993e-16, 2.1878365295445822e-16, 1.5890430434369751e-16, 7.2371476117099087e-17, 2.1242933215821270e-17, 4.0661702241884675e-18, 5.1343460359538658e-19, 4.4211027269515107e-20, 2.8869573127071386e-21, 1.8320613280717383e-22], [-4.8094922498604141e-19, -3.9996000232888887e-19, -1.1907106134056987e-18, -2.9096682323725478e-18, -3.9515764027143255e-18, -3.2316224095849306e-18, -1.6730274750731542e-18, -5.6151569907360695e-19, -1.2380171192384593e-19, -1.8207475168833111e-20, -1.8554819015504766e-21, -1.4595639068932071e-22, -1.1068475513278668e-23], [-6.8439293709634521e-20, -4.4305423154367773e-21, 5.1680187761369106e-20, 7.5282580399059896e-20, 8.0325215785994618e-20, 6.5725054931405271e-20, 3.7361506407886518e-20, 1.4170819047362551e-20, 3.5740784776460447e-21, 6.0806897429997382e-22, 7.2719873138571395e-23, 6.8113131661538731e-24, 6.0798693960948547e-25], [-1.9050555920373453e-21, -2.4428425315864190e-22, 7.1158789246626375e-22, 1.1704344138400718e-22, -8.3864841439157158e-22, -1.1243514367457350e-21, -7.8066209084651141e-22, -3.4085395277851167e-22, -9.8241783208751639e-23, -1.9228897387470810e-23, -2.6779513128921997e-24, -2.9551279119345672e-25, -3.0631463403058429e-26], [-1.1996402014520233e-23, -8.7669062173524493e-25, 8.7333030952859480e-24, 1.4561915306353321e-23, 2.0389018415943905e-23, 2.2093013174756579e-23, 1.6250097649151097e-23, 7.9202553434448737e-24, 2.5848248258109518e-24, 5.7842574286847848e-25, 9.3131051000696247e-26, 1.1989700826664615e-26, 1.4257771576268118e-27], [8.1791482140192422e-25, 7.7434685064107671e-26, -4.4227566241646643e-25, -4.7025083420054216e-25, -4.1687127474766583e-25, -4.0935657740049185e-25, -3.2478254125067871e-25, -1.7706359097894906e-25, -6.5220676832650711e-26, -1.6599404102780921e-26, -3.0685590619693628e-27, -4.5658676369694571e-28, -6.1591970734954503e-29]],
        [[6.7319021354851383e-2, 4.7116958205776590e-2, 2.2979347699615290e-2, 7.7385454817862262e-3, 1.7736922879768115e-3, 2.7101117932390675e-4, 2.6826130958957800e-5, 1.6547788537365198e-6, 6.0375464755804594e-8, 1.2157287231125006e-9, 1.2401235058423120e-11, 6.0116882455453371e-14, 1.8147111583942376e-16], [-9.6332604750247864e-4, -7.8069579039257493e-4, -4.8779855624020578e-4, -2.2122188056559461e-4, -6.9467449600714773e-5, -1.4580563310065702e-5, -1.9809677114680233e-6, -1.6803947431344643e-7, -8.5047505854710940e-9, -2.4230096546987223e-10, -3.6294957312465469e-12, -2.7519873364785870e-14, -1.3841902825971504e-16], [7.2323166483295143e-6, 9.0348013394317426e-6, 8.5860860345596910e-6, 5.2858335485565341e-6, 2.0841418715732700e-6, 5.2772668329152837e-7, 8.5219041840954972e-8, 8.6071231646801912e-9, 5.2640587968070596e-10, 1.8640900910920938e-11, 3.6345718594076088e-13, 3.8605010204926553e-15, 2.9677248954321536e-17], [-5.9514655188478706e-8, -1.1065033225572669e-7, -1.3575098786949051e-7, -1.0108504208769309e-7, -4.7543345489192550e-8, -1.4366875215299066e-8, -2.7813097192598202e-9, -3.3917829117549918e-10, -2.5331721088714459e-11, -1.1163875611118681e-12, -2.7985841367163681e-14, -4.0393695658107340e-16, -4.5081457115963729e-18], [4.7084950624412219e-10, 1.3153592704742266e-9, 2.0276875951403280e-9, 1.8238485838260440e-9, 1.0231486558990611e-9, 3.6601112456040938e-10, 8.3612656493959576e-11, 1.2060348575664367e-11, 1.0752609273724656e-12, 5.7608484460878774e-14, 1.8112354189484548e-15, 3.4481730248202107e-17, 5.3565730649192010e-19], [-8.7268436856648177e-13, -1.4742065004566161e-11, -3.0157031482631534e-11, -3.2270781329299188e-11, -2.1062874872507886e-11, -8.7237911186634994e-12, -2.3114767617178128e-12, -3.8913387874916904e-13, -4.0940819205406897e-14, -2.6346436518371572e-15, -1.0234444974650327e-16, -2.5150946339638825e-18, -5.2570220758382287e-20], [2.0571884160203606e-13, 1.9200338033244848e-13, 3.0844394773955977e-13, 4.2857264214318377e-13, 3.5974080494325791e-13, 1.8283603102942291e-13, 5.7776569119060944e-14, 1.1463788012122137e-14, 1.4223513351046730e-15, 1.0918228589474315e-16, 5.1789026705548029e-18, 1.6136116429893774e-19, 4.4104698686412014e-21], [3.8109756812997769e-15, -1.3905224717774503e-15, -7.1973883118052268e-15, -9.5608464217679592e-15, -7.7400865365068915e-15, -4.1132340429044970e-15, -1.4313909542955890e-15, -3.2198253130051832e-16, -4.6172854669506609e-17, -4.1734030701350022e-18, -2.3883128500158926e-19, -9.2864089456191903e-21, -3.2388006128728194e-22], [-2.0995177487326891e-17, 1.6544247401245131e-17, 7.8104484185754235e-17, 1.2870572316733698e-16, 1.2749771574712258e-16, 8.0308101508712522e-17, 3.2479620645589748e-17, 8.4362168552703243e-18, 1.4015319383373173e-18, 1.4845317465312466e-19, 1.0158570376772434e-20, 4.8621101565214674e-22, 2.1179824748254669e-23], [-4.8343224926086165e-18, -7.8172395492170581e-19, 1.5060698149605199e-18, 2.9399048405114482e-19, -1.2701552684295402e-18, -1.3465802049008697e-18, -6.8553987849488479e-19, -2.0896905863489067e-19, -4.0182747696152855e-20, -4.9584615603438971e-21, -4.0227723297779980e-22, -2.3407252687191088e-23, -1.2496863328809149e-24], [-1.4002944238220669e-19, -1.3612169564282722e-20, 7.9304883909882700e-20, 8.3476182901922824e-20, 5.6697630343635041e-20, 3.3148632868530095e-20, 1.5471549998812786e-20, 5.0672563077911429e-21, 1.1001654289471986e-21, 1.5660625936301866e-22, 1.4938212203845438e-23, 1.0447725670623774e-24, 6.7221959563783421e-26], [-5.3725353778102585e-22, -8.8831825285755482e-23, 1.3175557566206183e-22, -1.1946661277610041e-22, -4.4387475390535881e-22, -4.8420085132228151e-22, -2.9794241657875468e-22, -1.1491054446449381e-22, -2.8644964208065029e-23, -4.6959073531931000e-24, -5.2312523051875732e-25, -4.3522948356758181e-26, -3.3241826339000806e-27], [9.0926612766363124e-23, 9.8567399841038684e-24, -4.3512537998075688e-23, -3.2999591560620620e-23, -6.1237037914333397e-24, 5.7892610410287084e-24, 5.5415817912321646e-24, 2.5199276226527136e-24, 7.1611223263657155e-25, 1.3435133193983159e-25, 1.7358093167893493e-26, 1.7013672434805141e-27, 1.5216757758761440e-28], [3.2943052423950934e-24, 3.6178774052250741e-25, -1.6394463024050511e-24, -1.4374915011736171e-24, -6.5806647995384636e-25, -2.6348183695178026e-25, -1.2584255722925087e-25, -5.5120545801060483e-26, -1.7269929268241139e-26, -3.6776704144264552e-27, -5.4737354027447886e-28, -6.2621962204100970e-29, -6.4758967532195100e-30]],
        [[6.5448056964191663e-2, 4.5623879086834823e-2, 2.2067641288969317e-2, 7.3348670333009639e-3, 1.6498009319155149e-3, 2.4558832650921103e-4, 2.3454267263055416e-5, 1.3766468502698026e-6, 4.6786482026031021e-8, 8.4673422314964121e-10, 7.2537089416533381e-12, 2.5365595198036730e-14, 3.7614728628328887e-17], [-9.0819556407304754e-4, -7.1339166181186397e-4, -4.2511792656509475e-4, -1.8333704486653988e-4, -5.4827400194918077e-5, -1.0960690932011138e-5, -1.4130595326589698e-6, -1.1269025562370739e-7, -5.2689985885076014e-9, -1.3433477449826523e-10, -1.6932864684732527e-12, -9.4397794020811451e-15, -2.5360705412851743e-17], [6.5637259097265574e-6, 7.8243187206008360e-6, 7.1329582571700441e-6, 4.2281862605534760e-6, 1.5992797895771548e-6, 3.8538034405396563e-7, 5.8555905669899951e-8, 5.4791477588872378e-9, 3.0362364951415273e-10, 9.4077942340821917e-12, 1.5090617090966994e-13, 1.1625380406018780e-15, 4.9503963159780433e-18], [-5.1819956901292812e-8, -9.1725473524449954e-8, -1.0779348534410696e-7, -7.6590232167958416e-8, -3.4139712107173173e-8, -9.7025106378579843e-9, -1.7497713438243879e-9, -1.9611880198820354e-10, -1.3186274351320245e-11, -5.0564942367059939e-13, -1.0378912009051604e-14, -1.0873663674630152e-16, -6.9692650604321549e-19], [5.1019760684017247e-10, 1.0636301817549586e-9, 1.4840001730415793e-9, 1.2621342818202723e-9, 6.7293128668694829e-10, 2.2742803854215387e-10, 4.8527038769670105e-11, 6.4312874109576736e-12, 5.1454598211188814e-13, 2.3858821822148101e-14, 6.1075185858701102e-16, 8.4408781392960661e-18, 7.7764887348749921e-20], [5.0703418562416681e-12, -1.0571127721061067e-11, -2.4818877749007034e-11, -2.4700201570289165e-11, -1.4596451672560419e-11, -5.4639921578839736e-12, -1.3074346977079251e-12, -1.9744714920125495e-13, -1.8335013128941757e-14, -1.0096912911784597e-15, -3.1716637241188285e-17, -5.6651151475880827e-19, -7.2385297699033515e-21], [2.6937537118404442e-13, 1.5551031304205971e-13, 1.5425124805946715e-13, 2.2446779910431011e-13, 1.9611466828870848e-13, 9.7954606344968708e-14, 2.9260711646571709e-14, 5.3272933306219981e-15, 5.8869975647240501e-16, 3.8735990643155366e-17, 1.4845867042349226e-18, 3.3750206224821424e-20, 5.8046608441261409e-22], [-6.6879580565095483e-16, -1.4127366625416912e-15, -3.2571560528307475e-15, -4.6784162227808125e-15, -4.0027045137092983e-15, -2.1018241545766312e-15, -6.8928228139738083e-16, -1.4138723850487719e-16, -1.7945086979463869e-17, -1.3833147472347022e-18, -6.3793589526055304e-20, -1.8175472145799321e-21, -4.0997467571695460e-23], [-2.8496400165319617e-16, -2.0520589381975059e-17, 1.8280223592335699e-16, 1.9175675813064773e-16, 1.1614995201189272e-16, 5.0959428956577935e-17, 1.6342255424921909e-17, 3.6044070238842926e-18, 5.1622526555221271e-19, 4.6204187817766833e-20, 2.5419080350834777e-21, 8.9615961652889917e-23, 2.5916666013132016e-24], [-8.9557759642893938e-18, -1.1892541293927117e-18, 3.8491359834689293e-18, 2.7715728189199396e-18, 3.9113135961985975e-19, -4.1201022666176641e-19, -2.7062327419711614e-19, -8.0098563181958701e-20, -1.3786573855035867e-20, -1.4493312586855163e-21, -9.4702249098429106e-23, -4.0851590388794770e-24, -1.4844546902002346e-25], [-1.3743405613394851e-21, 4.9000168503136775e-22, 6.4232096738067192e-21, 1.4578985538070363e-20, 1.7876105607250689e-20, 1.3360945565068718e-20, 6.2969667760490597e-21, 1.8879911459202436e-21, 3.5951428898518456e-22, 4.3296831686715578e-23, 3.3237506706528346e-24, 1.7348509163179893e-25, 7.7788546016708566e-27], [8.2702250337060476e-21, 9.0317017481643264e-22, -4.1452051312908638e-21, -3.6360102782156432e-21, -1.5978618574079647e-21, -5.0933240318003968e-22, -1.5463469268646459e-22, -4.3211093697658315e-23, -8.9568589629924178e-24, -1.2309112101660082e-24, -1.1039439626923111e-25, -6.9049885932346551e-27, -3.7585603415621492e-28], [2.5942239506865753e-22, 3.0449222330929600e-23, -1.2598655699017685e-22, -1.0673961754222701e-22, -3.9215228786387761e-23, -5.7329688231049066e-24, 1.0544118046719107e-24, 7.7625015804659526e-25, 2.0804709069529208e-25, 3.3372950537963338e-26, 3.4852295293720147e-27, 2.5886548423758567e-28, 1.6853652765950185e-29], [9.7158557373186375e-25, 1.9515369328427851e-25, -4.3757200883507675e-25, -4.8386405364797073e-25, -2.7270147159599595e-25, -1.1950504241023110e-25, -5.0226397639398792e-26, -1.8372881394324126e-26, -4.8830319796879665e-27, -8.7253345974575237e-28, -1.0493049083144584e-28, -9.1691192302124905e-30, -7.0416437293760575e-31]],
        [[6.3180835035120318e-2, 4.3878387364439336e-2, 2.1059821442616698e-2, 6.9149095178341892e-3, 1.5282929354867693e-3, 2.2204941580442362e-4, 2.0513738770526578e-5, 1.1500314853305164e-6, 3.6613665296495845e-8, 6.0085478350990838e-10, 4.3863674700503038e-12, 1.1319316854355851e-14, 8.0425887541127740e-18], [-1.3503909517703305e-3, -1.0227448737155311e-3, -5.7488142085867873e-4, -2.3232042073804928e-4, -6.5179295224247202e-5, -1.2249837558584557e-5, -1.4834319111429381e-6, -1.1044703485914746e-7, -4.7532346236686876e-9, -1.0844813874314161e-10, -1.1553791900417327e-12, -4.7657186151479376e-15, -6.4649038407910030e-18], [1.4983044067092640e-5, 1.6787843977051517e-5, 1.4499445108598718e-5, 8.2162621302482420e-6, 2.9676080568474387e-6, 6.7791327304223802e-7, 9.6503696066979439e-8, 8.3197677503064653e-9, 4.1465133828355348e-10, 1.1130825803693049e-11, 1.4487835974383544e-13, 7.8995061556427802e-16, 1.6823317424007866e-18], [-1.6012195706582798e-7, -2.9538569002102356e-7, -3.4157628294106180e-7, -2.3182736042312456e-7, -9.7022279185529368e-8, -2.5562572055656063e-8, -4.2229967398658867e-9, -4.2737082395481602e-10, -2.5404692316360474e-11, -8.3194454663266766e-13, -1.3684806237337250e-14, -1.0050666093609940e-16, -3.2845603865177317e-19], [4.7730822108951614e-9, 5.5308187182354813e-9, 5.8883148655605607e-9, 4.5958182230534548e-9, 2.3642896707760298e-9, 7.7141147962067185e-10, 1.5637199902204792e-10, 1.9227153251213942e-11, 1.3831458280811589e-12, 5.5154927358666771e-14, 1.1299018276468359e-15, 1.0894081289983883e-17, 5.2270537191530935e-20], [1.0381162999707918e-10, -7.1483136695950740e-11, -2.0991071901506215e-10, -1.9452375711321521e-10, -1.0260320857867550e-10, -3.3891481480814462e-11, -7.1232374140188844e-12, -9.3841545646750669e-13, -7.4855676080745011e-14, -3.4318468656104918e-15, -8.4397595663515097e-17, -1.0401095708438997e-18, -7.0756221211621327e-21], [-1.0523816052246560e-12, 1.2782779123320857e-12, 3.5875564907268252e-12, 3.8363796157547305e-12, 2.4068941992421555e-12, 9.4973905671160698e-13, 2.3737094501255548e-13, 3.6990208013846750e-14, 3.4867795428280677e-15, 1.9028615482385825e-16, 5.6881654479259383e-18, 8.9127304676353946e-20, 8.3728561150796945e-22], [-4.9341894361263526e-13, -8.2999752940398161e-14, 1.8169078115495716e-13, 1.3394669448900999e-13, 2.6307622279817713e-14, -8.2703235793515745e-15, -5.4777271515826357e-15, -1.2490830786596003e-15, -1.4877987631950067e-16, -9.8104797460447487e-18, -3.5488141409365076e-19, -6.9792858168413008e-21, -8.8278487475547055e-23], [-1.8036576043093134e-14, -1.8478643736022978e-15, 9.8479491976252099e-15, 9.2708357837075154e-15, 4.4851119764698666e-15, 1.4476402743478859e-15, 3.4213794925263476e-16, 5.8710376930495130e-17, 6.8062508685123917e-18, 4.9183143398816179e-19, 2.0799582356380223e-20, 5.0502951586915674e-22, 8.4084305571989626e-24], [6.6501834231546214e-16, 6.8339472008482516e-17, -3.4744849472793698e-16, -3.1245702636553356e-16, -1.4212305615450072e-16, -4.3848735786163130e-17, -1.0613715731813691e-17, -2.0151383698584619e-18, -2.6883184681593190e-19, -2.2695192773162542e-20, -1.1403542029007851e-21, -3.4021952878502706e-23, -7.3123190836138905e-25], [8.0563424230897176e-17, 9.6336490827988323e-18, -3.8967231344205569e-17, -3.3256449736837550e-17, -1.2638425412340222e-17, -2.4047721282409679e-18, -1.3736666082166787e-19, 3.5934576360080123e-20, 9.1619060757466374e-21, 9.8525333008899791e-22, 5.9185114916415612e-23, 2.1496772021449224e-24, 5.8549991928385260e-26], [1.5669710783070551e-18, 2.1456837989950569e-19, -7.5390831326481633e-19, -6.9124771037191570e-19, -3.0077876012707995e-19, -8.0892511340427104e-20, -1.6048908259233355e-20, -2.7687169692308292e-21, -4.0707976107097636e-22, -4.3146521600026312e-23, -2.9386978731736256e-24, -1.2807847231440179e-25, -4.3459897468068726e-27], [-1.5620468445867457e-19, -1.6655375765399762e-20, 7.7392991918430667e-20, 6.5173194127223021e-20, 2.5264903792674412e-20, 5.5783593688076501e-21, 8.0537278197306774e-22, 1.0274218120954038e-22, 1.4516471074852716e-23, 1.7375073254164609e-24, 1.3841206900161174e-25, 7.2220815315649007e-27, 3.0074303881939380e-28], [-1.1212953253791600e-20, -1.3626394803502794e-21, 5.4523592058708876e-21, 4.7404544301008211e-21, 1.8856068617365273e-21, 4.1308629801220843e-22, 4.8789029506742372e-23, 1.9343023054968457e-24, -3.1060222618494146e-25, -6.4717962071796480e-26, -6.2289066672455830e-27, -3.8608823722468714e-28, -1.9427773800123339e-29]],
        [[6.0594831602415087e-2, 4.1956970249810786e-2, 2.0014019924431930e-2, 6.5079021716996361e-3, 1.4183536183063764e-3, 2.0212082755003664e-4, 1.8182469040760526e-5, 9.8237577844162344e-7, 2.9664778037217729e-8, 4.4933641611189561e-10, 2.8696197110509996e-12, 5.6698640976412866e-15, 1.8471289972436438e-18], [-1.2367917123783273e-3, -9.0121830330570339e-4, -4.7395822678774226e-4, -1.7672311603584346e-4, -4.5585870841068994e-5, -7.8872747976923752e-6, -8.8057513729884839e-7, -6.0332224941383335e-8, -2.3690450746590079e-9, -4.8297810481116085e-11, -4.3856598173764226e-13, -1.3665830894247547e-15, -9.0803674142089255e-19], [1.3569276081035099e-5, 1.3730065043741580e-5, 1.0848148697780888e-5, 5.7678100871356791e-6, 1.9739436011088529e-6, 4.2681778084018678e-7, 5.7040931107699965e-8, 4.5489765428111201e-9, 2.0488590792927192e-10, 4.7861245619656382e-12, 5.0671786955171779e-14, 1.9430381625878702e-16, 1.8804067412599973e-19], [-7.3880424477883915e-8, -2.1751710195175593e-7, -2.7415560806874159e-7, -1.8276251666555487e-7, -7.2025472107030671e-8, -1.7414455219290301e-8, -2.5861713472210718e-9, -2.3051513331467513e-10, -1.1773308200200105e-11, -3.1940663930744333e-13, -4.0817470328601399e-15, -2.0252530020987816e-17, -2.9790104851864660e-20], [5.3161169463296792e-9, 4.2048293352951624e-9, 3.0588009120065823e-9, 2.0250777931047447e-9, 1.0001981246115742e-9, 3.2102300272784598e-10, 6.3151102170718371e-11, 7.3387739993270832e-12, 4.8168523764250156e-13, 1.6682384451536109e-14, 2.7415225633869412e-16, 1.8133074131727252e-18, 3.9924289398845247e-21], [-1.0829437765619963e-10, -7.0385983528916592e-11, -4.9332774155467016e-11, -4.3481154962045712e-11, -2.8052825696657260e-11, -1.0806841808670955e-11, -2.4370062857081557e-12, -3.1920051739036329e-13, -2.3629633395168803e-14, -9.3619115629887680e-16, -1.8135371071679026e-17, -1.4986280309307314e-19, -4.6910507056185586e-22], [-1.5099634408999307e-11, -9.7669206521719698e-13, 9.1598815412355007e-12, 8.2801470563618317e-12, 3.6980039803325662e-12, 9.9228161740951584e-13, 1.6915136449700582e-13, 1.8511605550326631e-14, 1.2701292632615735e-15, 5.1442650168736249e-17, 1.1136210119713654e-18, 1.1258566363578460e-20, 4.9122983813561255e-23], [-1.3326945205500178e-13, -3.3228790390607432e-14, 3.0318431459595780e-14, 1.9652537640300014e-14, -1.8379072315890104e-15, -5.2308685279305958e-15, -2.0569613112788332e-15, -3.8803859246254002e-16, -3.9380122415392876e-17, -2.1451280107856571e-18, -5.9473830308949446e-20, -7.7144520605612722e-22, -4.6567015015996763e-24], [4.8645447853493667e-14, 6.1151272547634090e-15, -2.3099321181250386e-14, -1.9814180544564217e-14, -7.5992965660242870e-15, -1.5306430848168251e-15, -1.4622507847980576e-16, -1.1732471771323587e-18, 1.0126796761446787e-18, 8.7444652019156512e-20, 3.0783502567976186e-21, 4.9810287344714164e-23, 4.0455753788901096e-25], [1.6559976609679420e-15, 2.1549605067285990e-16, -8.0555124503943599e-16, -7.2564825891233392e-16, -3.0540713123711565e-16, -7.4848920795154971e-17, -1.1550805147554023e-17, -1.2007388226685851e-18, -8.9633420614175730e-20, -4.7705551899460481e-21, -1.6164888414020436e-22, -3.0427716282726208e-24, -3.2454833862452002e-26], [-1.1980199439935845e-16, -1.3664554482218909e-17, 5.8936714658690270e-17, 5.0566451600013927e-17, 1.9970254437566615e-17, 4.4392838624698522e-18, 5.9068335713358923e-19, 5.0763787881773419e-20, 3.3205350082421482e-21, 1.8520491349224409e-22, 7.4414032523446618e-24, 1.7348177187369588e-25, 2.4193142981798060e-27], [-8.4124950225450417e-18, -1.0832060455411107e-18, 4.0555894177203839e-18, 3.5876095863031244e-18, 1.4553901540076595e-18, 3.2921088483788532e-19, 4.2328292665170761e-20, 2.8611070791536949e-21, 6.3292534978994603e-23, -3.8162566199895700e-24, -3.1081413101442786e-25, -9.3968131601558305e-27, -1.6860532634857863e-28], [1.8032562219580072e-19, 1.5910915778914229e-20, -9.1084194269696731e-20, -7.3021156703864470e-20, -2.6276528620096587e-20, -4.9342336636887712e-21, -4.4510812589532929e-22, -5.9853530517939056e-24, 2.5305708390977005e-24, 2.7268912271078182e-25, 1.4958710779405332e-26, 4.9261579861448292e-28, 1.1034773460191669e-29], [3.2082831884290996e-20, 3.9973815292905700e-21, -1.5553814813230491e-20, -1.3636900272489727e-20, -5.4892734126042885e-21, -1.2361647981644420e-21, -1.6126815105868882e-22, -1.2111701482481441e-23, -5.3203100481071538e-25, -1.7240377768235031e-26, -6.6035196889251287e-28, -2.4354255445612779e-29, -6.7824075582510918e-31]],
        [[5.8227831034681602e-2, 4.0256840203975663e-2, 1.9143054393444629e-2, 6.1940400146885396e-3, 1.3404187336851031e-3, 1.8915474592447439e-4, 1.6789868940991980e-5, 8.9051945398691002e-7, 2.6192938011998715e-8, 3.8138041444921108e-10, 2.2818230870413106e-12, 3.9632086323202285e-15, 8.7164265768331523e-19], [-1.1306226034791713e-3, -8.0078994155179571e-4, -3.9950312449919990e-4, -1.3880318772727039e-4, -3.2993129092867296e-5, -5.2300411794558987e-6, -5.3362443346978585e-7, -3.3357238951502014e-8, -1.1909107111479979e-9, -2.1873850154923731e-11, -1.7486379532358277e-13, -4.5016483533823718e-16, -1.9143949497191349e-19], [1.3062635854464293e-5, 1.1473134597058573e-5, 7.8548997358486663e-6, 3.7724425449517180e-6, 1.2013858441249844e-6, 2.4530864125063691e-7, 3.1092635979124917e-8, 2.3437988394324696e-9, 9.8688420513842775e-11, 2.1085448123894434e-12, 1.9561736956152901e-14, 5.9621945513264576e-17, 3.3118717622040583e-20], [-2.3667598444888399e-8, -1.6265315661180710e-7, -2.2251102981694888e-7, -1.4774992506804076e-7, -5.6257819183487522e-8, -1.2878176792430196e-8, -1.7769477195028522e-9, -1.4413215908139875e-10, -6.5280583662252876e-12, -1.5150796199952340e-13, -1.5634837259837027e-15, -5.5859034312261309e-18, -4.2134275949903391e-21], [2.0551185996486442e-10, 2.6127127544418830e-9, 3.8727005080333461e-9, 2.7830050069001995e-9, 1.1647345478267865e-9, 2.9815220117350535e-10, 4.6796714889236243e-11, 4.3928551421457877e-12, 2.3460704132975638e-13, 6.5677920144744782e-15, 8.4400153509351166e-17, 3.9655958588150627e-19, 4.4839756077084471e-22], [-3.2950032844614140e-10, -8.1128399697231757e-11, 9.2338131256288273e-11, 8.5169390001462296e-11, 3.0092951576383664e-11, 4.9479967566543723e-12, 2.4765858980110713e-13, -3.0806803975536269e-14, -4.6674647599637654e-15, -2.1943184566914406e-16, -4.0729067921564329e-18, -2.6445193514167650e-20, -4.3933951445149324e-23], [2.7978179233206319e-12, 8.9305062855859797e-13, -2.5051652481267303e-13, -9.6491064042671767e-14, 1.4419362251780029e-13, 1.0590295484801102e-13, 3.0304102175861580e-14, 4.4276208506693510e-15, 3.4317292114943968e-16, 1.3615323948592503e-17, 2.5178019554175085e-19, 1.8299209202450928e-21, 4.0003714069070565e-24], [1.0848056560790998e-12, 1.2842723353961923e-13, -5.4377343488719527e-13, -4.8258672987776949e-13, -1.9976091523008656e-13, -4.7239711861950524e-14, -6.6924927412506083e-15, -5.7293680919345182e-16, -2.9440398104045930e-17, -8.8795062589846576e-19, -1.4739423931769774e-20, -1.1533960045032611e-22, -3.3244057437937291e-25], [-9.5390105231839334e-15, -7.7372357000083966e-16, 5.1048116150433235e-15, 4.2897929046090218e-15, 1.7132883200846672e-15, 4.0198229243024268e-16, 6.0734374586218558e-17, 6.3403463279884349e-18, 4.6376677386778859e-19, 2.1667197962622176e-20, 5.4709100272064197e-22, 6.1367366813874749e-24, 2.5444109784633726e-26], [-3.7878424651911723e-15, -4.8468260570730049e-16, 1.8249536344081091e-15, 1.6083852377916466e-15, 6.4923430383752295e-16, 1.4596534231434342e-16, 1.8731685909156174e-17, 1.3129613904344275e-18, 4.3257923930347371e-20, 2.6366610130004862e-22, -1.6561382688459418e-23, -3.1866596268479723e-25, -1.8373985943110241e-27], [3.6623667287019706e-17, 2.9910887101215789e-18, -1.8585827690472288e-17, -1.4585832809393539e-17, -5.0595272347104227e-18, -8.7349932222488982e-19, -5.9228290799315810e-20, 2.6786347570742209e-21, 6.8773254798431873e-22, 4.3481877403510414e-23, 1.2797410160101722e-24, 1.8370466003931988e-26, 1.2578063152245031e-28], [1.3124452409387695e-17, 1.6945622593649124e-18, -6.3299923707446806e-18, -5.6119199149851422e-18, -2.2869959305251482e-18, -5.2346879899785138e-19, -6.9735480467908666e-20, -5.3439087250411008e-21, -2.2835088863023757e-22, -5.3903400139447832e-24, -8.0062454824200050e-26, -9.5356597081964173e-28, -8.0647899886524094e-30], [-1.3583325340073338e-19, -9.2267240329990132e-21, 7.0254874649637053e-20, 5.3683977306735830e-20, 1.8075370070896049e-20, 3.0103636660645376e-21, 2.0561362411884009e-22, -2.9129608146662815e-24, -9.4004885843408141e-25, -2.1603606303288788e-26, 8.7900207695734576e-28, 3.7171799528732902e-29, 4.8560519962899018e-31], [-4.5451250822177524e-20, -5.9665052943884511e-21, 2.1862422632143833e-20, 1.9477731111986856e-20, 7.9754685765206546e-21, 1.8344265330969060e-21, 2.4508703697506709e-22, 1.8647399863333616e-23, 7.5931989241689597e-25, 1.4340644041225371e-26, 6.2778310093415911e-29, -1.5367856300304714e-30, -2.7964538508656375e-32]],
        [[5.6069938730663509e-2, 3.8741292906883781e-2, 1.8399253147512367e-2, 5.9416058060272874e-3, 1.2821553145529477e-3, 1.8022934203696067e-4, 1.5913062945715677e-5, 8.3790003740505139e-7, 2.4394016317335662e-8, 3.4983568830945114e-10, 2.0422954551790851e-12, 3.3844288991599320e-15, 6.5029360178303299e-19], [-1.0276348300691629e-3, -7.1621206574066969e-4, -3.4617490497433383e-4, -1.1484966573866267e-4, -2.5726808674946304e-5, -3.7981479703010682e-6, -3.5709086262923387e-7, -2.0363314151437415e-8, -6.5633325275344576e-10, -1.0745349547667106e-11, -7.5087375087535517e-14, -1.6232749840515194e-16, -5.0603614054516727e-20], [1.2616457590883133e-5, 9.7251767394026286e-6, 5.6045118159620481e-6, 2.3117987583479317e-6, 6.5416260174039081e-7, 1.2205676453312886e-7, 1.4403767130513914e-8, 1.0214687094596552e-9, 4.0587131481243813e-11, 8.1426131316047570e-13, 6.9693187339799123e-15, 1.8676871608155089e-17, 7.6315639807907747e-21], [-6.1074861443296362e-8, -1.3166740435555050e-7, -1.5030622606356954e-7, -9.3469050471557420e-8, -3.4179074854814489e-8, -7.5492582438194726e-9, -1.0020217217802433e-9, -7.7557225983627974e-11, -3.3069598149473875e-12, -7.0675867619574081e-14, -6.4594942869918168e-16, -1.8836726768965744e-18, -9.0246447726860739e-22], [-3.8557869257505483e-9, 1.4256073782409948e-9, 4.7253319202247493e-9, 3.6298849395211456e-9, 1.4537906104753859e-9, 3.3962701725190808e-10, 4.7156815423125921e-11, 3.8145045843807678e-12, 1.7090910187090648e-13, 3.8849749879016944e-15, 3.8627354473451999e-17, 1.2824230485818399e-19, 7.9053571707981271e-23], [-2.6373471046505381e-11, -3.1715822198768582e-11, -3.2838508500345701e-11, -2.3711837478099864e-11, -1.1049279474524695e-11, -3.2164436307916717e-12, -5.6990177434109041e-13, -5.9350104411229657e-14, -3.4426955583964182e-15, -1.0218172876667774e-16, -1.3499254529281459e-18, -6.1874359738361650e-21, -5.8472117363221124e-24], [1.5252760767492229e-11, 2.3336654929964318e-12, -6.6546254377915266e-12, -5.8674602450880885e-12, -2.3065530237203620e-12, -4.9522105031793113e-13, -5.9081450265216565e-14, -3.6785946178388147e-15, -9.7076646873585562e-17, -4.8995487073430035e-20, 3.1374958431407210e-20, 2.8219072446162577e-22, 4.2806642007762643e-25], [-3.5708914516344028e-13, -4.9235787710778375e-14, 1.6224321010493483e-13, 1.3995459020312359e-13, 5.3862485284594889e-14, 1.1139718453188123e-14, 1.2254892372147150e-15, 6.0650464685362320e-17, 1.5052605825828462e-19, -8.7746818025733189e-20, -2.4303731213860479e-21, -1.8734186726062790e-23, -3.2409368093755221e-26], [-3.9890354398408328e-14, -5.1458382478818931e-15, 1.9371906600394135e-14, 1.7289267736419559e-14, 7.1252032475544287e-15, 1.6603845060446016e-15, 2.2753261682882822e-16, 1.8202899172221018e-17, 8.2337915319397413e-19, 2.0011335743769865e-20, 2.4294430748628632e-22, 1.2981314031008806e-24, 2.2981721623393458e-27], [2.2561877956927877e-15, 2.8286188059870066e-16, -1.0950030461673134e-15, -9.6393822793989850e-16, -3.9027890171327013e-16, -8.8678676403561127e-17, -1.1719375096808404e-17, -8.9036091171508340e-19, -3.7532470923293059e-20, -8.4053101535899425e-22, -9.7639419983794946e-24, -5.7964772257432543e-26, -1.4199310572552436e-28], [7.1354551732311508e-17, 1.0091086519019394e-17, -3.3872086601988835e-17, -3.0893063023163269e-17, -1.2953754844396382e-17, -3.0658701095163026e-18, -4.2364891748088261e-19, -3.3442467316602128e-20, -1.4082966116544582e-21, -2.7066600881845633e-23, -1.3268311364648790e-25, 1.2236000109041067e-27, 7.9949564317964168e-30], [-9.3617500901840002e-18, -1.2133070827293604e-18, 4.5114212965634055e-18, 4.0025339251218276e-18, 1.6313257282284244e-18, 3.7292032953173185e-19, 4.9408975889033602e-20, 3.7168872997203976e-21, 1.4929601614983989e-22, 2.8259860721560110e-24, 1.8104997550388021e-26, -3.4517503714770774e-29, -4.6442430544457815e-31], [1.3626628996443163e-20, -2.3007139258330519e-21, -8.8851636217317533e-21, -3.6537798099520483e-21, 3.9788932000187334e-22, 6.6089929175456933e-22, 1.9068088271817237e-22, 2.5326699683410133e-23, 1.6936130394890788e-24, 5.6007578391557560e-26, 8.7547762017614113e-28, 6.6068242509196951e-30, 2.8400833754011613e-32], [3.0491999378097088e-20, 4.1210794448960643e-21, -1.4599215065817563e-20, -1.3130342428274232e-20, -5.4318437917418555e-21, -1.2663573108612400e-21, -1.7237631063025633e-22, -1.3485338573145234e-23, -5.7710720347339104e-25, -1.2417248917027377e-26, -1.1930057911096456e-28, -4.9149542400696944e-31, -1.5801462834742179e-33]],
        [[5.4112580042679852e-2, 3.7381919253078952e-2, 1.7746873366646962e-2, 5.7274967773374709e-3, 1.2348942544127550e-3, 1.7338247124997900e-4, 1.5284262488402726e-5, 8.0305504407997693e-7, 2.3309327765334896e-8, 3.3281650034192237e-10, 1.9295200301088212e-12, 3.1571574954835144e-15, 5.8678251421911502e-19], [-9.3061828531927346e-4, -6.4437459572906552e-4, -3.0736343598129768e-4, -9.9930542677509855e-5, -2.1771195585649437e-5, -3.0999396687005885e-6, -2.7839858280070367e-7, -1.4991899360581699e-8, -4.4977422551743117e-10, -6.7229170256941302e-12, -4.1683150952031014e-14, -7.6079708797211989e-17, -1.7712428774874290e-20], [1.1547105952521082e-5, 8.2691470572835388e-6, 4.2108674897107249e-6, 1.5036042974952752e-6, 3.6867303424947691e-7, 6.0316730632852266e-8, 6.3366287528685452e-9, 4.0579429054963800e-10, 1.4723491970596354e-11, 2.7147291128476228e-13, 2.1333823952958298e-15, 5.1607735165138161e-18, 1.7578114018332620e-21], [-1.1207954041279013e-7, -1.1156344385535989e-7, -8.6317973756952552e-8, -4.4812372320565452e-8, -1.4894192906863804e-8, -3.1019055089333556e-9, -3.9464317654104802e-10, -2.9467866974002311e-11, -1.2122434265472850e-12, -2.4847232161094719e-14, -2.1450688267958938e-16, -5.6925136472168440e-19, -2.1848841770774309e-22], [-1.9445761367102487e-9, 1.1861178128104910e-9, 3.0401426588057685e-9, 2.2452224663092606e-9, 8.7642569656079253e-10, 1.9944083409303000e-10, 2.6838654778618099e-11, 2.0865734488072696e-12, 8.8735457371815295e-14, 1.8775824247004145e-15, 1.6809187506515185e-17, 4.6976563937745917e-20, 2.0027468004296383e-23], [1.5295653948612233e-10, -9.4190681495630676e-13, -1.0546873747300491e-10, -8.8180151839714865e-11, -3.6066750951417696e-11, -8.4513451678773600e-12, -1.1663850627062719e-12, -9.3125707616016944e-14, -4.0878682153383702e-15, -9.0133014147439406e-17, -8.5529718149927272e-19, -2.6221304569141927e-21, -1.3471318857061732e-24], [-3.7963647795528582e-13, 2.2002303265909433e-13, 6.5018133906790059e-13, 5.5294123910615233e-13, 2.5529648176157563e-13, 7.0304944412954128e-14, 1.1673490868309712e-14, 1.1406975439544027e-15, 6.2260535203488259e-17, 1.7389662633175952e-18, 2.1473398923165880e-20, 8.9807370369861550e-23, 7.0358578425177753e-26], [-4.2074696688088213e-13, -5.7640351413705728e-14, 1.9607177569599626e-13, 1.7310254024267572e-13, 6.9474201850629124e-14, 1.5488671063474478e-14, 1.9734807227796146e-15, 1.3948390710717942e-16, 5.0403113066834447e-18, 7.7849740148602448e-20, 2.7333305813340567e-22, -1.5156305841905492e-24, -3.4155315879680775e-27], [2.1283146075727364e-14, 2.7894559027762852e-15, -1.0164121092116651e-14, -8.9840343476162871e-15, -3.6328576632742128e-15, -8.1953045126929167e-16, -1.0622091206076240e-16, -7.6985985423245789e-18, -2.8947276644500427e-19, -4.8238386120181353e-21, -2.2527360410314059e-23, 6.1168958831105506e-26, 2.0892893795940271e-28], [2.1413195705299062e-16, 2.9687852184780707e-17, -1.0322243200974712e-16, -9.4720844996759830e-17, -4.0327529495448767e-17, -9.8198864473866069e-18, -1.4279842309112139e-18, -1.2351758705349996e-19, -6.1554735552849219e-21, -1.6617613442434158e-22, -2.1798486197200551e-24, -1.1341154296585128e-26, -1.5316235136193593e-29], [-7.1450507612543546e-17, -9.4341877628964487e-18, 3.4354360041109432e-17, 3.0683063770636897e-17, 1.2604464209957506e-17, 2.9138993874073255e-18, 3.9270791886349140e-19, 3.0384598256227030e-20, 1.2864273280380998e-21, 2.7461189860898625e-23, 2.6089274080608076e-25, 9.2509651147159751e-28, 9.7608890170621027e-31], [2.6586626113300244e-18, 3.4210535323722940e-19, -1.2830748297425909e-18, -1.1362659218887217e-18, -4.6236782270970264e-19, -1.0554805577316588e-19, -1.3982462304630551e-20, -1.0567828248525825e-21, -4.3347514472892664e-23, -8.8906861229524018e-25, -8.1635450481238336e-27, -3.0554258316227776e-29, -4.5447089244894278e-32], [8.3955293447395919e-20, 1.1967054499777706e-20, -3.9838690989947802e-20, -3.6472638164921402e-20, -1.5366537460697015e-20, -3.6631334667974681e-21, -5.1218446621832569e-22, -4.1316612007829568e-23, -1.8223203688983794e-24, -3.9670311437202584e-26, -3.4739500446079614e-28, -6.3223224139731190e-31, 1.4550183568188785e-33], [-1.1417343618595871e-20, -1.5351961817957185e-21, 5.4709523751356108e-21, 4.9120964868841570e-21, 2.0282450015308172e-21, 4.7165700585654033e-22, 6.3967713926708593e-23, 4.9753825055103511e-24, 2.1058891015583050e-25, 4.4072116202310286e-27, 3.8304748894381141e-29, 9.1588406217017007e-32, -4.4465901822720858e-35]],
        [[5.2339230315915784e-2, 3.6155310560051328e-2, 1.7163038939439349e-2, 5.5383109411432303e-3, 1.1938702083386945e-3, 1.6757777278361434e-4, 1.4767248913659507e-5, 7.7551403441653151e-7, 2.2494874673331768e-8, 3.2087916264971065e-10, 1.8575579213936498e-12, 3.0314837779543037e-15, 5.5991330585335212e-19], [-8.4393531000199102e-4, -5.8325541270519998e-4, -2.7714099357193538e-4, -8.9565485066210555e-5, -1.9348657702695367e-5, -2.7237799129777942e-6, -2.4095666839521405e-7, -1.2719767668524343e-8, -3.7156293825740570e-10, -5.3530273466888896e-12, -3.1452968134337942e-14, -5.2630799449551219e-17, -1.0264051963662908e-20], [1.0107107314630921e-5, 7.0434860639384941e-6, 3.4035992790925598e-6, 1.1286706851423669e-6, 2.5260774169425071e-7, 3.7236984090765229e-8, 3.4919506307107210e-9, 1.9828323357709518e-10, 6.3457244759440248e-12, 1.0264514575011567e-13, 7.0188132681246266e-16, 1.4519096174715057e-18, 4.0043172904964513e-22], [-1.2189034291606152e-7, -9.2823315158061285e-8, -5.2471351973596968e-8, -2.1190775850177520e-8, -5.8754774597570263e-9, -1.0754578602472405e-9, -1.2454693692834929e-10, -8.6580966216049658e-12, -3.3614172527473630e-13, -6.5454359657859644e-15, -5.3644502042500461e-17, -1.3336387492682791e-19, -4.5282554372621195e-23], [4.4469120121236099e-10, 1.1387190630303426e-9, 1.3521943570613172e-9, 8.4820870839341017e-10, 3.0962641070059249e-10, 6.7864581666928858e-11, 8.8926557933664960e-12, 6.7548039280787308e-13, 2.8037395095013888e-14, 5.7601048345765485e-16, 4.9479929269092425e-18, 1.2907006901209247e-20, 4.6930402765919788e-24], [7.2818893361038880e-11, -5.7771042940924696e-12, -5.7570010544224109e-11, -4.6478129664636632e-11, -1.8643171375902971e-11, -4.2863776917338380e-12, -5.7849091361605289e-13, -4.4898670500307456e-14, -1.8985078028950859e-15, -3.9748178380220002e-17, -3.4938695331820728e-19, -9.4323315948870648e-22, -3.6824539772858740e-25], [-4.0119918213442422e-12, -3.2146426869645462e-13, 2.2509301074519036e-12, 1.9567019058360581e-12, 8.0538702461172021e-13, 1.8818582997877065e-13, 2.5760646661635270e-14, 2.0301744662576473e-15, 8.7455269168659785e-17, 1.8766856832731170e-18, 1.7093830683249475e-20, 4.8910757715730489e-23, 2.1569137856533876e-26], [6.7590527036530789e-14, 6.7226066814523867e-15, -3.6786500565385899e-14, -3.3006462251563673e-14, -1.4009505652669113e-14, -3.3980278381809589e-15, -4.8730794044932304e-16, -4.0702808439531926e-17, -1.8863211630416218e-18, -4.4441752916791063e-20, -4.5800816242929668e-22, -1.5604728135364675e-24, -9.1887648499181022e-28], [5.5806375944965225e-15, 7.4235893818543471e-16, -2.6336090033406589e-15, -2.3190365400116861e-15, -9.3095928191124522e-16, -2.0790033872258866e-16, -2.6590232439782777e-17, -1.8946177734218228e-18, -6.9756348360088372e-20, -1.1372934533432631e-21, -5.4351538920468473e-24, 8.3053495390907616e-27, 2.7208817881739224e-29], [-4.9221351023634412e-16, -6.4727188929746546e-17, 2.3605697209517904e-16, 2.0984779411636168e-16, 8.5590407283255890e-17, 1.9563258368970586e-17, 2.5881827789012347e-18, 1.9405350451427811e-19, 7.7618559311423785e-21, 1.4802913759769952e-22, 1.0865481070990963e-24, 1.7737029626056533e-27, -6.8872089119485180e-31], [1.4825657905444973e-17, 1.9557069320150827e-18, -7.1175347330374378e-18, -6.3419326084601088e-18, -2.5941358190319683e-18, -5.9509156356997437e-19, -7.9075896565646348e-20, -5.9585001565275655e-21, -2.3948928613659590e-22, -4.5755081566998915e-24, -3.3068283724812976e-26, -4.5175522356969633e-29, 4.7594545758908629e-32], [3.4347496525121381e-19, 4.6139422767574620e-20, -1.6473610143431216e-19, -1.4800628252029926e-19, -6.1211110454854017e-20, -1.4280948617600980e-20, -1.9493821087836801e-21, -1.5356964413649285e-22, -6.6707490845291811e-24, -1.4764116847221059e-25, -1.4692218069550854e-27, -5.3733312758783129e-30, -4.9725742600383953e-33], [-5.4432294419837842e-20, -7.2770777578193074e-21, 2.6110207620383237e-20, 2.3401461406860927e-20, 9.6445397959738489e-21, 2.2374386029833222e-21, 3.0254519016151652e-22, 2.3452393257509372e-23, 9.9006586141688487e-25, 2.0787087032931143e-26, 1.8664319058173936e-28, 5.5420331099007614e-31, 3.5418749389622479e-34], [2.2113610450722346e-21, 2.9421995897145165e-22, -1.0614956792543340e-21, -9.4984291588151346e-22, -3.9078227599732489e-22, -9.0456288043034867e-23, -1.2196446410773271e-23, -9.4198814708708632e-25, -3.9588246216447712e-26, -8.2702532459953062e-28, -7.4029290495942187e-30, -2.2262345096091596e-32, -1.5861049965820749e-35]],
        [[5.0727724131721585e-2, 3.5041831731432147e-2, 1.6634204476974464e-2, 5.3675296472024419e-3, 1.1570150631360512e-3, 1.6239686399253763e-4, 1.4309787220230665e-5, 7.5142596129542627e-7, 2.1793628926919784e-8, 3.1082496812472662e-10, 1.7989063984803160e-12, 2.9345212229475812e-15, 5.4149243499032067e-19], [-7.6872746830558225e-4, -5.3106438140655779e-4, -2.5213361045569022e-4, -8.1378550539163090e-5, -1.7547918535748062e-5, -2.4641595619924495e-6, -2.1726848817525821e-7, -1.1418595074147994e-8, -3.3154877807368153e-10, -4.7361126907050174e-12, -2.7475028550834490e-14, -4.4995070996475071e-17, -8.3716774171326315e-21], [8.7204861014366576e-6, 6.0339946288632872e-6, 2.8740751399199572e-6, 9.3233626902122870e-7, 2.0247822031910858e-7, 2.8706228963701104e-8, 2.5632063785103353e-9, 1.3696535785257254e-10, 4.0658546143667293e-12, 5.9867004131102500e-14, 3.6280807963328876e-16, 6.3670118612422066e-19, 1.3551036028661489e-22], [-1.0751741280137744e-7, -7.5857115304918160e-8, -3.7553206127232298e-8, -1.2897917860128803e-8, -3.0189082702578027e-9, -4.6926707392476231e-10, -4.6720719457038858e-11, -2.8318050303333584e-12, -9.7135107782745926e-14, -1.6890275683753854e-15, -1.2438661035400938e-17, -2.7718124154617925e-20, -8.1849204718946182e-24], [1.1416984119642377e-9, 9.6804274540528868e-10, 6.3429659886700828e-10, 2.9308810647119785e-10, 9.0268093337158303e-11, 1.7851433338359273e-11, 2.1860799105710107e-12, 1.5817920929145677e-13, 6.3177425174949240e-15, 1.2539909738299447e-16, 1.0388957922202232e-18, 2.5841202158589976e-21, 8.5778986250327964e-25], [7.2500384846120538e-12, -1.0147247939726777e-11, -1.9596082326660841e-11, -1.3811095161286918e-11, -5.2765440679219279e-12, -1.1817704650553587e-12, -1.5654693211920980e-13, -1.1950017927200304e-14, -4.9641037455411074e-16, -1.0167696547474942e-17, -8.6650354332242685e-20, -2.2220097865953680e-22, -7.7255104637581239e-26], [-1.4554238572642992e-12, -4.1643392389733787e-14, 9.2120741733750653e-13, 7.7501066054609283e-13, 3.1423428144526448e-13, 7.2463710604836934e-14, 9.7739380756443095e-15, 7.5622686482356363e-16, 3.1795225343758642e-17, 6.5963323639434212e-19, 5.7125453636264352e-21, 1.5010326044489842e-23, 5.4866101854390416e-27], [7.5931019272490871e-14, 8.1528348941775508e-15, -3.9473684481388444e-14, -3.4823750339528408e-14, -1.4346526963200435e-14, -3.3412451973384523e-15, -4.5460508070762601e-16, -3.5505874822625410e-17, -1.5100770690971955e-18, -3.1811861803402473e-20, -2.8169991466093550e-22, -7.6785637249317620e-25, -3.0335082459237213e-28], [-2.1387151832630825e-15, -2.6771669777348576e-16, 1.0633710453538021e-15, 9.5574965279538431e-16, 3.9847226467899625e-16, 9.4008461738094456e-17, 1.2994848169534373e-17, 1.0356870899403560e-18, 4.5234951420216944e-20, 9.8798392692219389e-22, 9.2132191925479614e-24, 2.7240372129561871e-26, 1.2582438666430864e-29], [-1.4195251280614997e-17, -1.6935321151711006e-18, 6.5433345420120475e-18, 5.3380675325091548e-18, 1.9145131235139484e-18, 3.5411574443807933e-19, 3.1369335174698098e-20, 6.8231162881922336e-22, -7.4063058058454434e-23, -4.6533118893274247e-24, -8.2947397527110469e-26, -4.2253263670140430e-28, -3.4460983684754637e-31], [5.1993686998073397e-18, 6.7884927974142159e-19, -2.4980740414534728e-18, -2.2171568357674800e-18, -9.0302544417143183e-19, -2.0606165043563121e-19, -2.7208611152084536e-20, -2.0356337652653279e-21, -8.1264219800825840e-23, -1.5495851801723412e-24, -1.1477200225500170e-26, -2.0303861081315728e-29, 2.7452782013995009e-33], [-2.9122698732174691e-19, -3.8594944913007968e-20, 1.3982292520311287e-19, 1.2488147189637960e-19, 5.1243789389932721e-20, 1.1811369288458481e-20, 1.5812336647856142e-21, 1.2061403556435165e-22, 4.9536600974171161e-24, 9.8803306727881918e-26, 7.9478824080562294e-28, 1.7464826786082031e-30, 2.1764838614605383e-34], [7.3482968404036252e-21, 9.8657377834282502e-22, -3.5216637448313855e-21, -3.1592856468891244e-21, -1.3026177210628217e-21, -3.0209743226954020e-22, -4.0767498426316312e-23, -3.1422861319591955e-24, -1.3083916426864332e-25, -2.6578747236795131e-27, -2.1907762098043966e-29, -4.9422368241650511e-32, -3.9745050701353965e-36], [1.2334203592602703e-22, 1.6151399300541426e-23, -5.9368162681803767e-23, -5.2865896754331667e-23, -2.1639377618161453e-23, -4.9767342617684288e-24, -6.6548272898290907e-25, -5.0856750572142882e-26, -2.1090669350371861e-27, -4.3367038894978590e-29, -3.8240769403217269e-31, -1.1544254373984456e-33, -8.7372403951189154e-37]],
        [[4.9256167984397385e-2, 3.4025268023464538e-2, 1.6151608927228204e-2, 5.2117868287234169e-3, 1.1234377021980314e-3, 1.5768291065000910e-4, 1.3894284405093184e-5, 7.2959845045075181e-7, 2.1160215594505692e-8, 3.0178413358969255e-10, 1.7465224859003906e-12, 2.8489067358603251e-15, 5.2563165576651931e-19], [-7.0381214935159158e-4, -4.8618571870703540e-4, -2.3079460634207727e-4, -7.4475066375083982e-5, -1.6054381019783372e-5, -2.2534951378975032e-6, -1.9858413419476066e-7, -1.0428946997200961e-8, -3.0251118394286846e-10, -4.3152662863413385e-12, -2.4981418722147523e-14, -4.0769449453393139e-17, -7.5295890683309809e-21], [7.5401650155627724e-6, 5.2099395002241355e-6, 2.4744228689786251e-6, 7.9909610573050417e-7, 1.7244931825726588e-7, 2.4242212317657369e-8, 2.1405186316330553e-9, 1.1270757113554823e-10, 3.2808330840159493e-12, 4.7029687774942010e-14, 2.7421534777314960e-16, 4.5274519416788336e-19, 8.5606280917110702e-23], [-8.9400473886377814e-8, -6.1985524821604229e-8, -2.9647184498247500e-8, -9.6789746146125763e-9, -2.1206644103053303e-9, -3.0416764620461430e-10, -2.7566160186811690e-11, -1.5009798003307355e-12, -4.5630965406276028e-14, -6.9267976363393585e-16, -4.3689664697502638e-18, -8.0995831622173361e-21, -1.8722994910737865e-24], [1.0712053186679813e-9, 7.6881499202363483e-10, 3.9301954534203299e-10, 1.4098501140243817e-10, 3.4716052916298299e-11, 5.6961366945438285e-12, 5.9873535019933927e-13, 3.8233686485396157e-14, 1.3767067409344363e-15, 2.5012367204567986e-17, 1.9137777251827905e-19, 4.3975629592459423e-22, 1.3190817805203989e-25], [-9.4418195525862312e-12, -9.3109681304051328e-12, -7.1349878282936791e-12, -3.6740983504136805e-12, -1.2115196497514592e-12, -2.5008281225264894e-13, -3.1473048470589560e-14, -2.3173563751379809e-15, -9.3546213911342009e-17, -1.8666524051569759e-18, -1.5465538134625035e-20, -3.8186507645271839e-23, -1.2356339646422866e-26], [-1.9239092873769396e-13, 7.9799848584961195e-14, 2.4512135497060660e-13, 1.8393667081975450e-13, 7.1773824066644099e-14, 1.6218555929430285e-14, 2.1561235074867468e-15, 1.6466477398355683e-16, 6.8268217477467738e-18, 1.3919011383134632e-19, 1.1762935421253665e-21, 2.9692669399470407e-24, 9.9434224126902664e-28], [2.0626709702933873e-14, 1.3641499692174986e-15, -1.1918454229780652e-14, -1.0213578003444387e-14, -4.1576260646239306e-15, -9.5896099113683725e-16, -1.2912021821512106e-16, -9.9568441449060354e-18, -4.1645844568029128e-19, -8.5723778082385068e-21, -7.3325609795058174e-23, -1.8850641902889434e-25, -6.5485565797360002e-29], [-1.0608536154394967e-15, -1.2429194197524747e-16, 5.3534442897400008e-16, 4.7467263000584633e-16, 1.9540249508736012e-16, 4.5380803502246001e-17, 6.1471350910830099e-18, 4.7709537546108381e-19, 2.0112695328711380e-20, 4.1834760426951529e-22, 3.6330064414978534e-24, 9.5742796781866084e-27, 3.5031925341415247e-30], [3.6978303190736103e-17, 4.7948292208008661e-18, -1.8044703345927518e-17, -1.6193888068095348e-17, -6.7099938447559713e-18, -1.5685600812658478e-18, -2.1413863119973966e-19, -1.6786125612258671e-20, -7.1702714200285537e-22, -1.5187588432615393e-23, -1.3544624974736221e-25, -3.7270743328754601e-28, -1.4884676670195015e-31], [-6.3273737833123678e-19, -8.7156449637734601e-20, 3.0503004684889198e-19, 2.7845326451174338e-19, 1.1736594452772710e-19, 2.8024597827502987e-20, 3.9304639851492607e-21, 3.1889373341290126e-22, 1.4239445948918469e-23, 3.1973455806524012e-25, 3.0883234678909029e-27, 9.5555976926253146e-30, 4.6721032136665268e-33], [-2.1680286845361631e-20, -2.6989212189280579e-21, 1.0474827970737515e-20, 9.1456030273093876e-21, 3.6547548852800245e-21, 8.1245839577374960e-22, 1.0334426887663188e-22, 7.3122142968665366e-24, 2.6678719919480797e-25, 4.3007569487112663e-27, 2.0457269382859650e-29, -2.5503174059924089e-32, -7.9694965399741988e-35], [2.3730182197409525e-21, 3.1130727065403553e-22, -1.1412394843279651e-21, -1.0160568401035114e-21, -4.1551307992414825e-22, -9.5351853620159821e-23, -1.2690542270856459e-23, -9.6039420581495388e-25, -3.9015233059599517e-26, -7.6603917464918171e-28, -6.0150477808602724e-30, -1.2688205963056826e-32, -1.5358173825473993e-36], [-1.0785977180121158e-22, -1.4380634267385826e-23, 5.1756843552024843e-23, 4.6334285542790292e-23, 1.9064277411120991e-23, 4.4101539186986935e-24, 5.9334797319723300e-25, 4.5577272471022306e-26, 1.8912073184371665e-27, 3.8341620645353809e-29, 3.1778535896073121e-31, 7.5248133160632005e-34, 1.7325248785752733e-37]],
        [[4.7905663428148390e-2, 3.3092359384270322e-2, 1.5708757849687677e-2, 5.0688858007250678e-3, 1.0926336897095932e-3, 1.5335920761041523e-4, 1.3513284778727715e-5, 7.0959085251929104e-7, 2.0579903549574173e-8, 2.9350699858041065e-10, 1.6986132311169025e-12, 2.7707398235512474e-15, 5.1120298684881457e-19], [-6.4750592206970745e-4, -4.4728582888000053e-4, -2.1232460123089958e-4, -6.8512945461910879e-5, -1.4768522789988234e-5, -2.0728862639351316e-6, -1.8265463780819505e-7, -9.5914278323278487e-9, -2.7818000263645003e-10, -3.9674465493109103e-12, -2.2961574457449648e-14, -3.7456397822861908e-17, -6.9114426781425192e-21], [6.5635517498012061e-6, 4.5341312357752867e-6, 2.1524717109851733e-6, 6.9463029067020687e-7, 1.4975457028595381e-7, 2.1023352003428495e-8, 1.8529664740623686e-9, 9.7334290830217590e-11, 2.8242524965785598e-12, 4.0304857018878164e-14, 2.3347382695859413e-16, 3.8140512354198074e-19, 7.0576493090416865e-23], [-7.3881546296313269e-8, -5.1063494681169601e-8, -2.4266241925139292e-8, -7.8436397173548177e-9, -1.6948376656429958e-9, -2.3865678970027848e-10, -2.1119638322127693e-11, -1.1152846533286329e-12, -3.2590506711777612e-14, -4.6962527990008845e-16, -2.7586739307616156e-18, -4.6073487599967414e-21, -8.8984513440262865e-25], [8.6766709382831827e-10, 6.0309997558845023e-10, 2.8991480690313399e-10, 9.5376306130152233e-11, 2.1115329486322338e-11, 3.0691846652730326e-12, 2.8278080756004013e-13, 1.5708859193004256e-14, 4.8918379345743451e-16, 7.6425838291925384e-18, 4.9898597598111487e-20, 9.6467063798700065e-23, 2.3479248255248373e-26], [-9.9283450002959500e-12, -7.2536285707298918e-12, -3.8276501551753184e-12, -1.4288948138395819e-12, -3.6708927279186755e-13, -6.2745540736922595e-14, -6.8442439023975404e-15, -4.5132596810744472e-16, -1.6694237402972263e-17, -3.0992984105359275e-19, -2.4097048192127975e-21, -5.5874551084535222e-24, -1.6683693328923602e-27], [7.1360704512004718e-14, 8.3030058514176415e-14, 7.2235561036554548e-14, 3.9871433557019605e-14, 1.3650861219932746e-14, 2.8782008785818848e-15, 3.6668444952074349e-16, 2.7183382230329463e-17, 1.1006488294877165e-18, 2.1958208143330858e-20, 1.8123185071364478e-22, 4.4320687371927558e-25, 1.3996196311145938e-28], [2.5786783148979637e-15, -5.8047051278486189e-16, -2.5748335185905419e-15, -1.9924032589263953e-15, -7.8466108082081922e-16, -1.7787536400974649e-16, -2.3657970400464174e-17, -1.8043851295855329e-18, -7.4586586829225657e-20, -1.5131861626393861e-21, -1.2684886720215141e-23, -3.1567440564803539e-26, -1.0240810314778261e-29], [-2.2395630894503953e-16, -1.8163697891846209e-17, 1.2441310084235502e-16, 1.0744528066985924e-16, 4.3781442209180803e-17, 1.0088923874941139e-17, 1.3555644491564353e-18, 1.0418991544669883e-19, 4.3372920021582383e-21, 8.8664750364836105e-23, 7.5041453657092887e-25, 1.8943244583754334e-27, 6.3189361894718609e-31], [1.1354753863061780e-17, 1.3718650875279266e-18, -5.6611842236697736e-18, -5.0259655418957773e-18, -2.0662977322176076e-18, -4.7871174451665535e-19, -6.4616132562064448e-20, -4.9906492377579747e-21, -2.0897359081440995e-22, -4.3049623527905629e-24, -3.6840125550858059e-26, -9.4676032078679626e-29, -3.2758558883509928e-32], [-4.3458178675307011e-19, -5.6742922280549904e-20, 2.1091991825285556e-19, 1.8895113427506371e-19, 7.8026993835500851e-20, 1.8152623553762378e-20, 2.4621883052016767e-21, 1.9133973969721885e-22, 8.0771392419936341e-24, 1.6826144269410614e-25, 1.4636910116500516e-27, 3.8633129003675891e-30, 1.4113979511145414e-33], [1.1751164990712095e-20, 1.5864142308631569e-21, -5.6496852424955076e-21, -5.0964522847122383e-21, -2.1171561380679056e-21, -4.9610959329207434e-22, -6.7914303050160104e-23, -5.3414204798241382e-24, -2.2910233381414940e-25, -4.8779308055958450e-27, -4.3790269694845603e-29, -1.2148922131958362e-31, -4.8866333956202053e-35], [-1.1977005598372912e-22, -1.7655679611647967e-23, 5.6784260440059197e-23, 5.2828191483363157e-23, 2.2660570751738333e-23, 5.5237152157704075e-24, 7.9409797305399701e-25, 6.6349587884705974e-26, 3.0670041915031845e-27, 7.1712247068576334e-29, 7.2608430330421835e-31, 2.3714490087894453e-33, 1.2265680914116725e-36], [-8.8579173253766275e-24, -1.1189930662971879e-24, 4.2832326200990673e-24, 3.7673801616584718e-24, 1.5199191580778048e-24, 3.4250445576721393e-25, 4.4448051143699944e-26, 3.2441882768173584e-27, 1.2477234557593705e-28, 2.2364496384295542e-30, 1.4617790039861559e-32, 1.6390197400498806e-35, -1.2653549748268780e-38]],
        [[4.6660509571033369e-2, 3.2232229315078992e-2, 1.5300458458848277e-2, 4.9371359429835446e-3, 1.0642340188292448e-3, 1.4937309083249693e-4, 1.3162045566918853e-5, 6.9114696014429630e-7, 2.0044980578812906e-8, 2.8587793987466778e-10, 1.6544609028298164e-12, 2.6987177995884274e-15, 4.9791426402269440e-19], [-5.9832222694879911e-4, -4.1331013623671036e-4, -1.9619605207374313e-4, -6.3308361487463321e-5, -1.3646565411889106e-5, -1.9153974653153399e-6, -1.6877586709598531e-7, -8.8625338576932800e-9, -2.5703595082272462e-10, -3.6658092613060911e-12, -2.1215200609429550e-14, -3.4605913205897097e-17, -6.3848629198279292e-21], [5.7540584854773229e-6, 3.9748132893616776e-6, 1.8868357339957616e-6, 6.0884929642216628e-7, 1.3124386142572051e-7, 1.8421450447070551e-8, 1.6232577450772716e-9, 8.5241504560130254e-11, 2.4723413275813013e-12, 3.5262540680253655e-14, 2.0409518164993115e-16, 3.3296735998740151e-19, 6.1450922927444427e-23], [-6.1480532352195785e-8, -4.2472457011008654e-8, -2.0164180374890600e-8, -6.5079354827617871e-9, -1.4032492885454296e-9, -1.9703538815287742e-10, -1.7371006001045686e-11, -9.1279712091562647e-13, -2.6497936305893253e-14, -3.7838871237793676e-16, -2.1938517068761959e-18, -3.5888813056438724e-21, -6.6582818478972696e-25], [6.8912947105848326e-10, 4.7644516546694216e-10, 2.2656113457878749e-10, 7.3305307880992848e-11, 1.5861859020904569e-11, 2.2377428220683459e-12, 1.9850839629950935e-13, 1.0515883104042395e-14, 3.0855603485504162e-16, 4.4705939930666732e-18, 2.6459836395361771e-20, 4.4686314114339183e-23, 8.7957995198344979e-27], [-7.8787329193857209e-12, -5.4886198299994428e-12, -2.6502311300760483e-12, -8.7772641262177703e-13, -1.9605748643894488e-13, -2.8815905630947319e-14, -2.6905110591876494e-15, -1.5179315134212031e-16, -4.8110868055368587e-18, -7.6665843788898710e-20, -5.1158874603085995e-22, -1.0124592720243464e-24, -2.5209396178976143e-28], [8.5959412800108507e-14, 6.3638171266027640e-14, 3.4347497242860288e-14, 1.3167585952174341e-14, 3.4728272521749387e-15, 6.0768709983254314e-16, 6.7601383650861532e-17, 4.5282946621706861e-18, 1.6950319390610745e-19, 3.1728229804306748e-21, 2.4774528340295805e-23, 5.7385625078493296e-26, 1.6926366802177579e-29], [-5.2813225716218162e-16, -6.9232848569520632e-16, -6.4706231447372350e-16, -3.6928662256052813e-16, -1.2851434792604034e-16, -2.7323759415889728e-17, -3.4953838354153256e-18, -2.5949594612500658e-19, -1.0500418744170652e-20, -2.0892837083732530e-22, -1.7151996476169689e-24, -4.1526965674937363e-27, -1.2826107084264800e-30], [-2.4686710458972558e-17, 4.2140913618195450e-18, 2.2689159411019506e-17, 1.7759177924000878e-17, 7.0136625094833418e-18, 1.5903607562147308e-18, 2.1129874140869322e-19, 1.6081366833835866e-20, 6.6254481212278664e-22, 1.3375333788107001e-23, 1.1127936359874180e-25, 2.7342100243914731e-28, 8.6333228111101236e-32], [1.9409412299739648e-18, 1.6707786978943290e-19, -1.0632204318603128e-18, -9.2017272169368467e-19, -3.7477234144410981e-19, -8.6238561217536078e-20, -1.1561569702699544e-20, -8.8587779204837200e-22, -3.6719316224564296e-23, -7.4604341995155426e-25, -6.2561336678108185e-27, -1.5549999002124532e-29, -5.0180379090135115e-33], [-9.6586734632408339e-20, -1.1767675751188841e-20, 4.7953073966744339e-20, 4.2555449612852217e-20, 1.7470010590441363e-20, 4.0385562161637672e-21, 5.4349218975390754e-22, 4.1807373456415644e-23, 1.7409400325010845e-24, 3.5584491454696821e-26, 3.0095025081285548e-28, 7.5822194574445237e-31, 2.5137878693844706e-34], [3.8410330102410986e-21, 5.0106623856531959e-22, -1.8614611087179835e-21, -1.6646751819189886e-21, -6.8575896973637998e-22, -1.5901578029735652e-22, -2.1474311974960785e-23, -1.6590450156790365e-24, -6.9477940040477043e-26, -1.4311702540658172e-27, -1.2241530970738015e-29, -3.1410779812820399e-32, -1.0803793102028816e-35], [-1.2152906963771568e-22, -1.6253115349657066e-23, 5.8438508815795400e-23, 5.2492536419047017e-23, 2.1697764462085331e-23, 5.0513557454749487e-24, 6.8560220386281111e-25, 5.3315829026119450e-26, 2.2523537917129368e-27, 4.6957887037044124e-29, 4.0876067526514998e-31, 1.0788035947150846e-33, 3.9229422131233457e-37], [2.7153488419174746e-24, 3.7170782840388324e-25, -1.2993351706156451e-24, -1.1749027747244693e-24, -4.8888892791228719e-25, -1.1477075944429816e-25, -1.5746003684264756e-26, -1.2417407071342260e-27, -5.3434859733740939e-29, -1.1422233846844115e-30, -1.0301920504188621e-32, -2.8719569703119793e-35, -1.1556265997554364e-38]],
        [[4.5507686184041480e-2, 3.1435879893814988e-2, 1.4922435813393541e-2, 4.8151559697528499e-3, 1.0379403801259286e-3, 1.4568258358028372e-4, 1.2836855499523019e-5, 6.7407102373837997e-7, 1.9549735589346927e-8, 2.7881483694726706e-10, 1.6135845604022172e-12, 2.6320411188768642e-15, 4.8561234385080602e-19], [-5.5506465809001762e-4, -3.8342854977244021e-4, -1.8201138542719330e-4, -5.8731245399678397e-5, -1.2659929303860224e-5, -1.7769145177643967e-6, -1.5657325881783842e-7, -8.2217571697055951e-9, -2.3845143457675170e-10, -3.4007524499735510e-12, -1.9681173591651567e-14, -3.2103480689366869e-17, -5.9231061811450199e-21], [5.0775954306315619e-6, 3.5075116151239615e-6, 1.6649973154220176e-6, 5.3726020857289048e-7, 1.1581036392035573e-7, 1.6254873439846752e-8, 1.4323061077282074e-9, 7.5211537047402265e-11, 2.1813322854141081e-12, 3.1109978590738110e-14, 1.8004441995700052e-16, 2.9368850237894858e-19, 5.4187079659287857e-23], [-5.1608981858782879e-8, -3.5650799892966919e-8, -1.6923483170204059e-8, -5.4609765614490476e-9, -1.1771892843827358e-9, -1.6523430699719700e-10, -1.4560484341302841e-11, -7.6463652367612820e-13, -2.2178538770561964e-14, -3.1634858561543602e-16, -1.8311517220807702e-18, -2.9878134695443421e-21, -5.5155707568077657e-25], [5.5072440377222165e-10, 3.8046904027996347e-10, 1.8064402963098711e-10, 5.8308864311887392e-11, 1.2574591943054878e-11, 1.7660128710067521e-12, 1.5573748794241682e-13, 8.1864754391998995e-15, 2.3775949032091657e-16, 3.3973255569322622e-18, 1.9714676240116994e-20, 3.2294075616471336e-23, 6.0057378296028074e-27], [-6.0379550178972502e-12, -4.1755262286335789e-12, -1.9865796657047017e-12, -6.4327891928592731e-13, -1.3934629301934313e-13, -1.9687147090232233e-14, -1.7497084421999714e-15, -9.2912198862012648e-17, -2.7345931298050907e-18, -3.9778779827946584e-20, -2.3668759135116801e-22, -4.0270063469081811e-25, -8.0172082093121084e-29], [6.6791870708019580e-14, 4.6590798580161130e-14, 2.2555396141547396e-14, 7.4988712383770268e-15, 1.6834537133600014e-15, 2.4894465454059344e-16, 2.3408830150573264e-17, 1.3311568313082374e-18, 4.2552522029061699e-20, 6.8412961857148850e-22, 4.6052057922753607e-24, 9.1826487092365050e-27, 2.2926122352270695e-30], [-6.9911056541941851e-16, -5.2014220831381762e-16, -2.8304678415205218e-16, -1.0951451428003585e-16, -2.9132564089262271e-17, -5.1341611473481016e-18, -5.7422616024260686e-19, -3.8604010299278757e-20, -1.4476987733492621e-21, -2.7096927339208385e-23, -2.1106062623138414e-25, -4.8579483326847033e-28, -1.4109196310293728e-31], [4.0782856350693172e-18, 5.4322707734941623e-18, 5.1195456903613080e-18, 2.9312409090569335e-18, 1.0210878016822079e-18, 2.1704801560992240e-19, 2.7736319552534610e-20, 2.0553392090083449e-21, 8.2939802183403310e-23, 1.6436576898561351e-24, 1.3412566819925141e-26, 3.2154055930147014e-29, 9.7344469021391793e-33], [1.8304409546059545e-19, -3.2228355028474587e-20, -1.6954464344353523e-19, -1.3243309246113430e-19, -5.2225010078087498e-20, -1.1822946042664841e-20, -1.5676780514374720e-21, -1.1900343989386778e-22, -4.8860278971802086e-24, -9.8169255433038596e-26, -8.1104734422180405e-28, -1.9702118691766080e-30, -6.0783014072485764e-34], [-1.3801294468337273e-20, -1.1720471448326231e-21, 7.5766842437718412e-21, 6.5471047679564866e-21, 2.6627943910274523e-21, 6.1168003560416934e-22, 8.1822914972276635e-23, 6.2511840248561964e-24, 2.5809201305953067e-25, 5.2150966824171119e-27, 4.3379273344479522e-29, 1.0639483539760391e-31, 3.3403320130097438e-35], [6.7267441553186562e-22, 8.1630893782063788e-23, -3.3407606759378087e-22, -2.9607349802427434e-22, -1.2135921469781419e-22, -2.7998868222953376e-23, -3.7580976877445174e-24, -2.8808077199955730e-25, -1.1939817025765152e-26, -2.4244158838183544e-28, -2.0303892731353201e-30, -5.0330701458210101e-33, -1.6131519956180739e-36], [-2.7036151022417476e-23, -3.5120685626047226e-24, 1.3105413680130867e-23, 1.1700115081852752e-23, 4.8103830986421319e-24, 1.1125867089472263e-24, 1.4974155230148764e-25, 1.1516643821591540e-26, 4.7936476722298741e-28, 9.7903020468033220e-30, 8.2681888598838879e-32, 2.0772370519186937e-34, 6.8361688668301840e-38], [9.1306540659224028e-25, 1.2124503333808433e-25, -4.3937464404601851e-25, -3.9362469810813156e-25, -1.6222112675869322e-25, -3.7620396116286182e-26, -5.0802232554637492e-27, -3.9241353322362329e-28, -1.6427759476038585e-29, -3.3817346953388759e-31, -2.8889659365778558e-33, -7.3927830548527364e-36, -2.5226652047247073e-39]],
        [[4.4436316516055477e-2, 3.0695797257416891e-2, 1.4571122734689979e-2, 4.7017946314788214e-3, 1.0135045542023845e-3, 1.4225283518320827e-4, 1.2534642392412620e-5, 6.5820163044730976e-7, 1.9089483698899898e-8, 2.7225080612092794e-10, 1.5755965529328675e-12, 2.5700759643146759e-15, 4.7417975102412084e-19], [-5.1677997235067272e-4, -3.5698218295305665e-4, -1.6945743965768325e-4, -5.4680349402973286e-5, -1.1786729900210333e-5, -1.6543544356802945e-6, -1.4577383544009374e-7, -7.6546720707946189e-9, -2.2200452370035461e-10, -3.1661889061975237e-12, -1.8323679221196301e-14, -2.9889154725075890e-17, -5.5145579406807233e-21], [4.5074368350877082e-6, 3.1136552829915641e-6, 1.4780347899470435e-6, 4.7693076734728521e-7, 1.0280576067716024e-7, 1.4429549088691301e-8, 1.2714634657749547e-9, 6.6765334994590025e-11, 1.9363615343342702e-12, 2.7616058161527527e-14, 1.5982248821263619e-16, 2.6069899729359463e-19, 4.8099146840607664e-23], [-4.3682708192169769e-8, -3.0175239221595152e-8, -1.4324036968146791e-8, -4.6220753883619558e-9, -9.9632358071717189e-10, -1.3984193442262478e-10, -1.2322271761591228e-11, -6.4705447523128102e-13, -1.8766362494928219e-14, -2.6764585752584039e-16, -1.5489736703694341e-18, -2.5267175251284679e-21, -4.6620305053141638e-25], [4.4450156557812946e-10, 3.0705684661453067e-10, 1.4576133204607696e-10, 4.7035703864619378e-11, 1.0139354339332193e-11, 1.4232235489989411e-12, 1.2541813584652207e-13, 6.5864994319605163e-15, 1.9105232330883848e-16, 2.7252839214132254e-18, 1.5776369673809750e-20, 2.5744925061139925e-23, 4.7536404561590860e-27], [-4.6517293291108921e-12, -3.2137370418036990e-12, -1.5259378524817571e-12, -4.9258619170400497e-13, -1.0624038074753603e-13, -1.4922909749527323e-14, -1.3162425181331702e-15, -6.9206515819186900e-17, -2.0106066723633314e-18, -2.8741568831033965e-20, -1.6688406413269034e-22, -2.7359958144460337e-25, -5.0952978345334257e-29], [4.9522285333087897e-14, 3.4250882005319286e-14, 1.6299238851086156e-14, 5.2797728689015722e-15, 1.1442582795242964e-15, 1.6176650867357315e-16, 1.4388713331396145e-17, 7.6482972621064828e-19, 2.2538345631860795e-20, 3.2835298325440615e-22, 1.9573718442132942e-24, 3.3377192728798748e-27, 6.6600701392458882e-31], [-5.2911888389432778e-16, -3.6912824891505819e-16, -1.7873819314545927e-16, -5.9440745272459801e-17, -1.3348296635813571e-17, -1.9744871954863355e-18, -1.8570090506154680e-19, -1.0559715911493023e-20, -3.3741683428553307e-22, -5.4187867420782565e-24, -3.6391789214976229e-26, -7.2218868878435245e-29, -1.7831203705346970e-32], [5.3570351013310506e-18, 3.9705386318590520e-18, 2.1468690902479245e-18, 8.2447423228426499e-19, 2.1770049079389186e-19, 3.8102994075829703e-20, 4.2348840155540899e-21, 2.8303528847637134e-22, 1.0553008278951711e-23, 1.9631163027509272e-25, 1.5180071791727765e-27, 3.4594292612849191e-30, 9.8747866866672350e-34], [-3.2822901276250946e-20, -4.0195869181064206e-20, -3.6095739462698412e-20, -2.0205054321677022e-20, -6.9551811632589946e-21, -1.4676482733201513e-21, -1.8655715418031419e-22, -1.3762154628136512e-23, -5.5287323036664894e-25, -1.0901205794429484e-26, -8.8378350175749718e-29, -2.0983193529494544e-31, -6.2383644202710774e-35], [-1.0774004144561081e-21, 2.5469658049680874e-22, 1.0913395847778187e-21, 8.4059728994015238e-22, 3.2974776758524003e-22, 7.4404308900097000e-23, 9.8378038220696734e-24, 7.4457041797763048e-25, 3.0462165617889711e-26, 6.0922739053868719e-28, 5.0006827421724212e-30, 1.2023977022062373e-32, 3.6358003585723095e-36], [8.2113348039144815e-23, 6.4218213418632706e-24, -4.5840757717664534e-23, -3.9419812338924202e-23, -1.5996626528896245e-23, -3.6673464156508478e-24, -4.8947441803021119e-25, -3.7291720938804241e-26, -1.5340985326380082e-27, -3.0845654607726300e-29, -2.5473766012864730e-31, -6.1759845236089365e-34, -1.8946752573156299e-37], [-3.9251854678172925e-24, -4.6958668199150523e-25, 1.9572988926323353e-24, 1.7309482826492035e-24, 7.0837017477092817e-25, 1.6312466160476921e-25, 2.1843576307935087e-26, 1.6693030847608827e-27, 6.8902278834352648e-29, 1.3911347273080152e-30, 1.1553387437415794e-32, 2.8252655803247050e-35, 8.8097134162639015e-39], [1.5697293816599657e-25, 2.0256933796340299e-26, -7.6199670491477131e-26, -6.7911857321669779e-26, -2.7873636317195078e-26, -6.4329772785200758e-27, -8.6337997710749985e-28, -6.6157057646780467e-29, -2.7399977877433097e-30, -5.5573101874099864e-32, -4.6454933131099510e-34, -1.1477324430191505e-36, -3.6505317794927460e-40]],
        [[4.3437237056206452e-2, 3.0005651382151672e-2, 1.4243514359608497e-2, 4.5960823038061299e-3, 9.9071752624507545e-4, 1.3905450782850706e-4, 1.2252821016307263e-5, 6.4340301999081031e-7, 1.8660287201253698e-8, 2.6612968230635186e-10, 1.5401717848185520e-12, 2.5122919165918093e-15, 4.6351857740038041e-19], [-4.8270301796050952e-4, -3.3344244387087320e-4, -1.5828325729536512e-4, -5.1074675788120374e-5, -1.1009501815034104e-5, -1.5452647362999766e-6, -1.3616136968358241e-7, -7.1499156319513448e-9, -2.0736532955237009e-10, -2.9574072866809202e-12, -1.7115397377689500e-14, -2.7918232895366888e-17, -5.1509219792739051e-21], [4.0230425689953179e-6, 2.7790444630983116e-6, 1.3191968213273397e-6, 4.2567705289193048e-7, 9.1757652231043608e-8, 1.2878863074264030e-8, 1.1348241043060130e-9, 5.9590299560229128e-11, 1.7282668987079378e-12, 2.4648234865643941e-14, 1.4264668999536996e-16, 2.3268194098304449e-19, 4.2929891931170650e-23], [-3.7255087320932670e-8, -2.5735136608921735e-8, -1.2216326455493550e-8, -3.9419521832825438e-9, -8.4971545299642987e-10, -1.1926386991598994e-10, -1.0508969140713037e-11, -5.5183264026768054e-13, -1.6004531218970377e-14, -2.2825400757004254e-16, -1.3209759297604734e-18, -2.1547496363619181e-21, -3.9755351505381663e-25], [3.6224710490926072e-10, 2.5023394572631631e-10, 1.1878489263649567e-10, 3.8329506343542199e-11, 8.2622285500001392e-12, 1.1596715666947499e-12, 1.0218552943099065e-13, 5.3658780218021534e-15, 1.5562586932500956e-16, 2.2195479301987487e-18, 1.2845506519665474e-20, 2.0954081783213291e-23, 3.8662974277382494e-27], [-3.6228689952153157e-12, -2.5026441386496678e-12, -1.1880224231894032e-12, -3.8336551517388915e-13, -8.2641844947669125e-14, -1.1600281884097537e-14, -1.0222642635805584e-15, -5.3686741024474497e-17, -1.5573170906186537e-18, -2.2215327420955217e-20, -1.2860863413493906e-22, -2.0988752361545059e-25, -3.8759112640718958e-29], [3.6898622786207436e-14, 2.5492338037755611e-14, 1.2104406338120873e-14, 3.9075101060074499e-15, 8.4279695263801762e-16, 1.1838781669898125e-16, 1.0442750889059773e-17, 5.4910791088011745e-19, 1.5954268197824549e-20, 2.2809092822417123e-22, 1.3245554665259466e-24, 2.1718864228960228e-27, 4.0452342124457760e-31], [-3.8025565548896871e-16, -2.6298476414876375e-16, -1.2513901331449451e-16, -4.0531030423202881e-17, -8.7825364618674126e-18, -1.2413041918017627e-18, -1.1037369638669596e-19, -5.8641716764068560e-21, -1.7269483256257945e-22, -2.5135138010487856e-24, -1.4961107147876897e-26, -2.5445681876872412e-29, -5.0490974524112250e-33], [3.9239422617000060e-18, 2.7348661483456383e-18, 1.3217718660864583e-18, 4.3832555480814030e-19, 9.8063210755673290e-20, 1.4437573929445572e-20, 1.3501904199956326e-21, 7.6265790773040234e-23, 2.4179152290870031e-24, 3.8473459774022822e-26, 2.5550546033050691e-28, 4.9978283605388913e-31, 1.2074665982990089e-34], [-3.8676145470290897e-20, -2.8375322134581363e-20, -1.5078647562724671e-20, -5.6735602923627138e-21, -1.4678807900314656e-21, -2.5217557769745757e-22, -2.7572629068955886e-23, -1.8166812990958717e-24, -6.6882221264781332e-26, -1.2296340519303057e-27, -9.3971285336733658e-30, -2.1130944945977765e-32, -5.9163340490408100e-36], [2.6064263298054750e-22, 2.8022902540025106e-22, 2.3024846067398267e-22, 1.2314815052386312e-22, 4.1365379395183829e-23, 8.6017853733815786e-24, 1.0827154042026280e-24, 7.9280490674846878e-26, 3.1647270770141053e-27, 6.2009184644216284e-29, 4.9913133651012244e-31, 1.1736645390606684e-33, 3.4313961154981379e-37], [4.9674426107707760e-24, -1.9585782771091840e-24, -6.1626599395938212e-24, -4.6196300271789237e-24, -1.7947368784745483e-24, -4.0282725547650380e-25, -5.3057020347092838e-26, -4.0015369396014296e-27, -1.6309853846016726e-28, -3.2470865626709855e-30, -2.6490352478858421e-32, -6.3105465823492366e-35, -1.8749696713141592e-38], [-4.1434330218415105e-25, -2.6638381828720037e-26, 2.3948252743161261e-25, 2.0413655454134379e-25, 8.2566835827389294e-26, 1.8884448105129633e-26, 2.5146041610183695e-27, 1.9106569287237251e-28, 7.8335022397675403e-30, 1.5679749706504210e-31, 1.2866073303443662e-33, 3.0878110523650644e-36, 9.2880111868594692e-40], [1.9502599642524585e-26, 2.2672637190155221e-27, -9.8118096787333080e-27, -8.6492822668713576e-27, -3.5333473935089171e-27, -8.1218573272434594e-28, -1.0852121029241702e-28, -8.2703105265419780e-30, -3.4012131720017503e-31, -6.8327082707678099e-33, -5.6334748853270472e-35, -1.3617027183084318e-37, -4.1500942020876390e-41]],
        [[4.2502665775367663e-2, 2.9360066581047840e-2, 1.3937058876663049e-2, 4.4971955693501297e-3, 9.6940180244480461e-4, 1.3606268886493732e-4, 1.1989196176994735e-5, 6.2955992070930776e-7, 1.8258802905377418e-8, 2.6040378500295440e-10, 1.5070343106398195e-12, 2.4582388496397526e-15, 4.5354577106435604e-19], [-4.5221360153371030e-4, -3.1238091088495321e-4, -1.4828546573534024e-4, -4.7848598862606104e-5, -1.0314098479275554e-5, -1.4476597514135208e-6, -1.2756088316830044e-7, -6.6982988943749637e-9, -1.9426732118424479e-10, -2.7706058280504090e-12, -1.6034321638414268e-14, -2.6154807563057584e-17, -4.8255694797008665e-21], [3.6085126983388419e-6, 2.4926947797139222e-6, 1.1832682267310724e-6, 3.8181575301776196e-7, 8.2303042815101202e-8, 1.1551838764519086e-8, 1.0178930205818056e-9, 5.3450176399805262e-11, 1.5501880066829364e-12, 2.2108504475111038e-14, 1.2794850487002606e-16, 2.0870658706842976e-19, 3.8506425482260801e-23], [-3.1994057354296940e-8, -2.2100911589420704e-8, -1.0491178833195187e-8, -3.3852826552206106e-9, -7.2972125107996641e-10, -1.0242175957802889e-10, -9.0249180268908439e-12, -4.7390391017523682e-13, -1.3744392464406109e-14, -1.9602008606389240e-16, -1.1344267873123840e-18, -1.8504505566089279e-21, -3.4140875960955438e-25], [2.9785112773709154e-10, 2.0575014601635813e-10, 9.7668456954511129e-11, 3.1515563978560052e-11, 6.7934017142063683e-12, 9.5350448906757576e-13, 8.4018330069162590e-14, 4.4118569438317742e-15, 1.2795496295907327e-16, 1.8248735427838024e-18, 1.0561108942680594e-20, 1.7227085493948460e-23, 3.1784195827905363e-27], [-2.8520877611609760e-12, -1.9701725608941053e-12, -9.3523212358278925e-13, -3.0178085557698311e-13, -6.5051305492461182e-14, -9.1304942830556948e-15, -8.0454304247551889e-16, -4.2247542821792340e-17, -1.2253028565847222e-18, -1.7475414514390191e-20, -1.0113836950331218e-22, -1.6498173118262181e-25, -3.0441533635710791e-29], [2.7815662079476447e-14, 1.9214809325099417e-14, 9.1214112345017052e-15, 2.9434121654297371e-15, 6.3451063867400845e-16, 8.9065304890230200e-17, 7.8488235930587683e-18, 4.1220198490526416e-19, 1.1956994000919752e-20, 1.7056889546682705e-22, 9.8745983934422435e-25, 1.6115264128072834e-27, 2.9759232436940154e-31], [-2.7476767525709085e-16, -1.8982855007546675e-16, -9.0133849090325542e-17, -2.9095970967878052e-17, -6.2753661431297733e-18, -8.8145555145330947e-19, -7.7745951393314390e-20, -4.0877034526803856e-21, -1.1875230478364799e-22, -1.6974338588377601e-24, -9.8544852072925896e-27, -1.6150964657348680e-29, -3.0052726953867382e-33], [2.7376337388505319e-18, 1.8930558797672801e-18, 9.0051125764734023e-19, 2.9152251992631790e-19, 6.3125831260553035e-20, 8.9138955100022854e-21, 7.9165061307073682e-22, 4.1994684612546090e-23, 1.2341585090424747e-24, 1.7912829254361364e-26, 1.0620441970269686e-28, 1.7955101558732599e-31, 3.5240430102507925e-35], [-2.7296489491368743e-20, -1.8994576026723785e-20, -9.1510325108376818e-21, -3.0202516526494906e-21, -6.7142671224779072e-22, -9.8071495868478894e-23, -9.0844108440939179e-24, -5.0740081949900458e-25, -1.5877593743240196e-26, -2.4882918790949271e-28, -1.6230996503775425e-30, -3.1054422938741812e-33, -7.2763112240042438e-37], [2.6276714837445876e-22, 1.9027639251316156e-22, 9.8818992432832179e-23, 3.6149430948114055e-23, 9.0826432331846259e-24, 1.5175454325832171e-24, 1.6180604598997986e-25, 1.0426302488322351e-26, 3.7636249280514672e-28, 6.7972715300718053e-30, 5.1075733915252729e-32, 1.1284929419027875e-34, 3.0898127421219678e-38], [-1.9427443737140029e-24, -1.8376609450432097e-24, -1.3530919209169075e-24, -6.7795744391992233e-25, -2.1925522258174933e-25, -4.4542557014431833e-26, -5.5203329901567651e-27, -3.9969635390867871e-28, -1.5812101685182825e-29, -3.0732814742901228e-31, -2.4533371908591399e-33, -5.7107397745405425e-36, -1.6431438052303493e-39], [-1.6268424885939105e-26, 1.4021115121785111e-26, 3.1164386751614319e-26, 2.2366830329865638e-26, 8.5541571752707420e-27, 1.9043743861839555e-27, 2.4947891895156140e-28, 1.8733594511007865e-29, 7.6035872728217668e-31, 1.5067073276629944e-32, 1.2219417027281892e-34, 2.8859582204818873e-37, 8.4421084641341558e-41], [1.7812056635834078e-27, 6.3623040686262497e-29, -1.0979535120488590e-27, -9.2162725207984901e-28, -3.7089911039056362e-28, -8.4563126705886516e-29, -1.1230888512663417e-29, -8.5096806192426988e-31, -3.4773420149140300e-32, -6.9312699036192652e-34, -5.6542085934942347e-36, -1.3448293391804454e-38, -3.9768298147984497e-42]],
        [[4.1625945370247223e-2, 2.8754444110132885e-2, 1.3649573287660515e-2, 4.4044300204230741e-3, 9.4940554278726543e-4, 1.3325606642064597e-4, 1.1741889973063403e-5, 6.1657372281559548e-7, 1.7882170880310699e-8, 2.5503232634861136e-10, 1.4759480785769269e-12, 2.4075317205374454e-15, 4.4419029123647349e-19], [-4.2480431101396335e-4, -2.9344707273673476e-4, -1.3929767899635857e-4, -4.4948429245187896e-5, -9.6889467347971216e-6, -1.3599150957662539e-6, -1.1982924197107150e-7, -6.2923057526506395e-9, -1.8249251068741126e-10, -2.6026755841649773e-12, -1.5062459267942958e-14, -2.4569528565136892e-17, -4.5330850497160881e-21], [3.2514060912587080e-6, 2.2460120460955046e-6, 1.0661693166997177e-6, 3.4403039908717399e-7, 7.4158146748909475e-8, 1.0408642549698767e-8, 9.1716001291900783e-10, 4.8160625329851808e-11, 1.3967778712082731e-12, 1.9920596461743722e-14, 1.1528642859459426e-16, 1.8805250533128561e-19, 3.4695741062696724e-23], [-2.7650950367591321e-8, -1.9100772370337893e-8, -9.0670294827672466e-9, -2.9257395856109454e-9, -6.3066352984811307e-10, -8.8518275498563070e-11, -7.7998089109399131e-12, -4.0957267060153994e-13, -1.1878625776067662e-14, -1.6941083965217878e-16, -9.8043102580980817e-19, -1.5992560019227639e-21, -2.9506319609187441e-25], [2.4690951661707377e-10, 1.7056059340850151e-10, 8.0964157842701358e-11, 2.6125430256013263e-11, 5.6315184742492728e-12, 7.9042516149839827e-13, 6.9648504600905766e-14, 3.6572852175149446e-15, 1.0607037318513054e-16, 1.5127568861161563e-18, 8.7547763273553081e-21, 1.4280588167745172e-23, 2.6347736741051902e-27], [-2.2677742386466916e-12, -1.5665372526226652e-12, -7.4362659561739110e-13, -2.3995272704109475e-13, -5.1723502998669708e-14, -7.2597791803116383e-15, -6.3969765705378515e-16, -3.3590942924512235e-17, -9.7422211396132779e-19, -1.3894205565864351e-20, -8.0410099192530586e-23, -1.3116352145285967e-25, -2.4199855821985520e-29], [2.1214367461683637e-14, 1.4654515896983655e-14, 6.9564335602330814e-15, 2.2447032477051763e-15, 4.8386398387441651e-16, 6.7914359013124686e-17, 5.9843452686642603e-18, 3.1424534731035325e-19, 9.1140390241484550e-21, 1.2998550867488205e-22, 7.5228664976283255e-25, 1.2271652644326622e-27, 2.2642946631158925e-31], [-2.0102906876737157e-16, -1.3886891473814486e-16, -6.5921940104992679e-17, -2.1272446166777472e-17, -4.5856722256815137e-18, -6.4367940100716850e-19, -5.6723309841427947e-20, -2.9789394772629427e-21, -8.6410463187216737e-23, -1.2326336936974091e-24, -7.1357362725198802e-27, -1.1644821535273138e-29, -2.1501559127442094e-33], [1.9230865802024589e-18, 1.3285751748762588e-18, 6.3080473427665238e-19, 2.0361628248558243e-19, 4.3911692265893600e-20, 6.1672234765292654e-21, 5.4387447690000003e-22, 2.8589747105923710e-23, 8.3033477426583234e-25, 1.1864250121459965e-26, 6.8840871476206482e-29, 1.1273082220858449e-31, 2.0942654988729640e-35], [-1.8518891143124376e-20, -1.2802965574132168e-20, -6.0876221006684536e-21, -1.9694195858877093e-21, -4.2605374334079788e-22, -6.0086932780767304e-23, -5.3276549338855332e-24, -2.8201815385956700e-25, -8.2652011442108424e-27, -1.1952182588163278e-28, -7.0502955431203437e-31, -1.1828770989690428e-33, -2.2907565486764657e-37], [1.7849787278189283e-22, 1.2398815719770053e-22, 5.9520293672732628e-23, 1.9538580165970593e-23, 4.3121865375951415e-24, 6.2410622169244335e-25, 5.7168288596171615e-26, 3.1507327970998662e-27, 9.7050436189118826e-29, 1.4928985272592813e-30, 9.5237336598442951e-33, 1.7725198977926755e-35, 3.9985711133484815e-39], [-1.6787665811877266e-24, -1.1999950367219125e-24, -6.0872112259454093e-25, -2.1601853597230381e-25, -5.2489602853120828e-26, -8.4800930630636881e-27, -8.7571569596772469e-28, -5.4787822879848516e-29, -1.9252107567920710e-30, -3.3923348185031716e-32, -2.4905639785245321e-34, -5.3761983065627884e-37, -1.4325407107372829e-40], [1.3291911822521438e-26, 1.1331550212641587e-26, 7.4604618393023534e-27, 3.4516925860987648e-27, 1.0600331620284108e-27, 2.0818669893272864e-28, 2.5211702339777689e-29, 1.7952005710907223e-30, 7.0104991884493327e-32, 1.3477339754410814e-33, 1.0648303640604829e-35, 2.4506791563257895e-38, 6.9385373613438738e-42], [1.1044052673094165e-29, -9.4099836551363551e-29, -1.4527366607710696e-28, -9.7528211958652189e-29, -3.6341307572330027e-29, -7.9754960059869022e-30, -1.0356550709517762e-30, -7.7291480713459311e-32, -3.1220861273416911e-33, -6.1523117792704360e-35, -4.9589937985634567e-37, -1.1615098725935136e-39, -3.3496643965042554e-43]],
        [[4.0801342502847300e-2, 2.8184823484035172e-2, 1.3379177572399723e-2, 4.3171790140663028e-3, 9.3059798115844534e-4, 1.3061628650713867e-4, 1.1509285138401006e-5, 6.0435950268732908e-7, 1.7527928129733621e-8, 2.4998017952725028e-10, 1.4467097992557965e-12, 2.3598389283982191e-15, 4.3539095744176434e-19], [-4.0005642482106200e-4, -2.7635168417434246e-4, -1.3118259396212660e-4, -4.2329862100972741e-5, -9.1244963633743141e-6, -1.2806903253200331e-6, -1.1284833248797287e-7, -5.9257339862042354e-9, -1.7186101809318011e-10, -2.4510511361467737e-12, -1.4184963399290448e-14, -2.3138177984824467e-17, -4.2690004580605856e-21], [2.9418859346440531e-6, 2.0322011652531690e-6, 9.6467449115685890e-7, 3.1128015500969308e-7, 6.7098603714132892e-8, 9.4177836449722713e-9, 8.2985024487385338e-10, 4.3575936756295292e-11, 1.2638105039503577e-12, 1.8024239621027039e-14, 1.0431164636211437e-16, 1.7015069912727670e-19, 3.1392852670783824e-23], [-2.4037374565479569e-8, -1.6604580085000851e-8, -7.8821010040793755e-9, -2.5433881014000388e-9, -5.4824500559405455e-10, -7.6950227903745784e-11, -6.7804876271940497e-12, -3.5604749400507280e-13, -1.0326262530586768e-14, -1.4727131142819420e-16, -8.5230297023222233e-19, -1.3902565190383210e-21, -2.5650272586877128e-25], [2.0622303919720524e-10, 1.4245511555308416e-10, 6.7622644153331726e-11, 2.1820404063415820e-11, 4.7035399614295022e-12, 6.6017650736484555e-13, 5.8171610114028664e-14, 3.0546263390926523e-15, 8.8591758763167983e-17, 1.2634798464851451e-18, 7.3121345026597425e-21, 1.1927381665523125e-23, 2.2006053918734872e-27], [-1.8197914228679945e-12, -1.2570787450046287e-12, -5.9672823661721888e-13, -1.9255164745118657e-13, -4.1505849053188416e-14, -5.8256521366497331e-15, -5.1332875324179172e-16, -2.6955204417228549e-17, -7.8176802097108523e-19, -1.1149437304369878e-20, -6.4525128070932282e-23, -1.0525189599192464e-25, -1.9419013712184898e-29], [1.6355914425603660e-14, 1.1298368598406324e-14, 5.3632732708560196e-15, 1.7306159490012027e-15, 3.7304647555561632e-16, 5.2359853324449177e-17, 4.6137044290283082e-18, 2.4226863942667844e-19, 7.0264018357170256e-21, 1.0020945723444319e-22, 5.7994334517781626e-25, 9.4599317256483481e-28, 1.7453704513159340e-31], [-1.4891257947722818e-16, -1.0286620587311783e-16, -4.8830118240267634e-17, -1.5756505171642152e-17, -3.3964405294884227e-18, -4.7671848893607089e-19, -4.2006509790908809e-20, -2.2058107113626573e-21, -6.3974883958310750e-23, -9.1241521088654321e-25, -5.2805533115575086e-27, -8.6138394668706589e-30, -1.5893597483509351e-33], [1.3687986798585959e-18, 9.4555070091710069e-19, 4.4885683655621935e-19, 1.4484126786344960e-19, 3.1222933671434321e-20, 4.3826288412433542e-21, 3.8620621914800233e-22, 2.0281949984719689e-23, 5.8830367450854356e-25, 8.3917375425149472e-27, 4.8577143408320229e-29, 7.9266179263903209e-32, 1.4633719265742491e-35], [-1.2674155704965626e-20, -8.7557971954757078e-21, -4.1570263151977717e-21, -1.3417344049390533e-21, -2.8932556844622607e-22, -4.0628691248506164e-23, -3.5822717544268486e-24, -1.8826141829379416e-25, -5.4658871659257661e-27, -7.8064520790088136e-29, -4.5267407880450587e-31, -7.4056278602114132e-34, -1.3733593093020414e-37], [1.1798011165712092e-22, 8.1547253762164391e-23, 3.8757225254575132e-23, 1.2529766892755596e-23, 2.7080057742024807e-24, 3.8142294352319097e-25, 3.3762618807757580e-26, 1.7833528940556771e-27, 5.2118300143045559e-29, 7.5086004148496267e-31, 4.4063156603991727e-33, 7.3363525959370764e-36, 1.4020020932711526e-39], [-1.0997238849617975e-24, -7.6263544981576933e-25, -3.6489090802161868e-25, -1.1918069704353597e-25, -2.6124298080949759e-26, -3.7480684425835325e-27, -3.3962407159008389e-28, -1.8472716982558769e-29, -5.6002809165749471e-31, -8.4505776700932819e-33, -5.2650419851963020e-35, -9.5081481537076769e-38, -2.0557630260739630e-41], [1.0096292642678635e-26, 7.1357540125916939e-27, 3.5458452481571744e-27, 1.2235320682489637e-27, 2.8771896646445666e-28, 4.4883577247665173e-29, 4.4731580105125640e-30, 2.7024064322337147e-31, 9.1871399114020612e-33, 1.5681944774276606e-34, 1.1167811302652075e-36, 2.3376989471573144e-39, 6.0178222987962537e-43], [-8.7450866064500737e-29, -6.6524921873325504e-29, -4.0098081548421609e-29, -1.6911205655675441e-29, -4.8456397400782854e-30, -9.1250560765067235e-31, -1.0635948117878510e-31, -7.3901113189707094e-33, -2.8150738713492141e-34, -5.3223655379061627e-36, -4.1538752835854962e-38, -9.4133625639483912e-41, -2.6163599054857060e-44]],
        [[4.0023889175030490e-2, 2.7647772900220104e-2, 1.3124242673471126e-2, 4.2349168877396341e-3, 9.1286580733939001e-4, 1.2812744519989552e-4, 1.1289980294914062e-5, 5.9284367311556167e-7, 1.7193940441626318e-8, 2.4521690678816733e-10, 1.4191433203405779e-12, 2.3148731376802176e-15, 4.2709475618953152e-19], [-3.7762167286641464e-4, -2.6085416656923117e-4, -1.2382600930628311e-4, -3.9956047064915537e-5, -8.6128040121876040e-6, -1.2088705319189767e-6, -1.0651991431792608e-7, -5.5934249320738569e-9, -1.6222322934032586e-10, -2.3135987147958410e-12, -1.3389485272675237e-14, -2.1840612812554720e-17, -4.0295993125378577e-21], [2.6720992063441547e-6, 1.8458374122711470e-6, 8.7620866323841374e-7, 2.8273409426003375e-7, 6.0945301657826663e-8, 8.5541223425991373e-9, 7.5374852388257374e-10, 3.9579789497551663e-11, 1.1479122982574224e-12, 1.6371320117030635e-14, 9.4745708579297720e-17, 1.5454696686197322e-19, 2.8513959602157225e-23], [-2.1008978149825874e-8, -1.4512619056404737e-8, -6.8890588407208173e-9, -2.2229542954365296e-9, -4.7917326865870125e-10, -6.7255500456108672e-11, -5.9262344121383027e-12, -3.1119014249048205e-13, -9.0252878098338988e-15, -1.2871704233074992e-16, -7.4492388488471995e-19, -1.2151022846724247e-21, -2.2418671918308477e-25], [1.7343879902688038e-10, 1.1980836012143644e-10, 5.6872356349504138e-11, 1.8351512416201501e-11, 3.9557962161372140e-12, 5.5522515897612371e-13, 4.8923796895231534e-14, 2.5690180767293984e-15, 7.4507911320303980e-17, 1.0626185205966757e-18, 6.1496900701606837e-21, 1.0031229517161059e-23, 1.8507647192735576e-27], [-1.4727257518618680e-12, -1.0173320982496667e-12, -4.8292183968417514e-13, -1.5582871399311537e-13, -3.3589963847310098e-14, -4.7145990479093866e-15, -4.1542801771649285e-16, -2.1814375831117035e-17, -6.3267113821567588e-19, -9.0230428268782202e-21, -5.2219038592987568e-23, -8.5178466627281340e-26, -1.5715451953402089e-29], [1.2736976229590232e-14, 8.7984710176285563e-15, 4.1765848917867059e-15, 1.3476960733743748e-15, 2.9050527743348586e-16, 4.0774558949825276e-17, 3.5928601635705581e-18, 1.8866326774147709e-19, 5.4717043454746979e-21, 7.8036479771318287e-23, 4.5162044400521046e-25, 7.3667281246837774e-28, 1.3591640350577116e-31], [-1.1158725047785774e-16, -7.7082444871422112e-17, -3.6590610648666447e-17, -1.1807023215040348e-17, -2.5450870076368171e-18, -3.5722190614211920e-19, -3.1476714200508495e-20, -1.6528626660309299e-21, -4.7937180167315296e-23, -6.8367250816940063e-25, -3.9566245611008657e-27, -6.4539719032671974e-30, -1.1907656898819136e-33], [9.8700274481330814e-19, 6.8180409516231341e-19, 3.2364915394641825e-19, 1.0443505772360403e-19, 2.2511790021574096e-20, 3.1597118224694401e-21, 2.7842060762691169e-22, 1.4620159331576826e-23, 4.2402568944193038e-25, 6.0474677468604666e-27, 3.4999206821238840e-29, 5.7091583671660208e-32, 1.0533951462725984e-35], [-8.7947619096584137e-21, -6.0753073081803066e-21, -2.8839589298409391e-21, -9.3061516184244908e-22, -2.0060729303352411e-22, -2.8157966894739911e-23, -2.4812897223415089e-24, -1.3030377446894950e-25, -3.7795012838296699e-27, -5.3909529235102728e-29, -3.1204596430545412e-31, -5.0913567064333403e-34, -9.3978133534713294e-38], [7.8823052759859385e-23, 5.4452726920066145e-23, 2.5851498527354405e-23, 8.3432822694846135e-24, 1.7989188097398489e-24, 2.5257861443919551e-25, 2.2266016398882007e-26, 1.1698805969133981e-27, 3.3955071692727378e-29, 4.8474674721633408e-31, 2.8092534769958845e-33, 4.5917718067186210e-36, 8.5018096200645764e-40], [-7.0956928384641951e-25, -4.9035720649755004e-25, -2.3296307804462577e-25, -7.5269194966967069e-26, -1.6254002642090416e-26, -2.2868209323085063e-27, -2.0213043338625100e-28, -1.0656595118630526e-29, -3.1067826686583117e-31, -4.4614198312330615e-33, -2.6064534050177265e-35, -4.3110553289899027e-38, -8.1450258195867889e-42], [6.4012963362271740e-27, 4.4334687213514811e-27, 2.1157883384112089e-27, 6.8819661899405912e-28, 1.4995972876465030e-28, 2.1359828694360757e-29, 1.9180680232213980e-30, 1.0317696792470057e-31, 3.0834090046443498e-33, 4.5722951872287912e-35, 2.7881338629544844e-37, 4.8906757740499421e-40, 1.0125202478065744e-43], [-6.2644007955675705e-29, -4.2429447259387278e-29, -2.1278114238148899e-29, -7.1913123592022594e-30, -1.6411124188972835e-30, -2.4635395317204728e-31, -2.3417244627379802e-32, -1.3320298956883594e-33, -4.3862732062111642e-35, -7.0781552695942026e-37, -4.8886002508387822e-39, -9.9436139028489019e-42, -2.4509038570368627e-45]],
    ],
    [
        [[1.0735178232411701e-1, 1.0329830533716984e-1, 9.5812619321442911e-2, 8.5944115123450540e-2, 7.4874969097870941e-2, 6.3646876395958679e-2, 5.2997944131156088e-2, 4.3328365900346453e-2, 3.4758080689281646e-2, 2.7221390147055731e-2, 2.0555646882412487e-2, 1.4563890667371382e-2, 9.0497043428389825e-3, 3.8362757282696862e-3], [-2.6583217656136581e-3, -5.2665590265084821e-3, -9.8105918653008888e-3, -1.5190333073699658e-2, -2.0242014913812035e-2, -2.4054088556865591e-2, -2.6124974980212137e-2, -2.6352392015806244e-2, -2.4917165335903525e-2, -2.2141084662418671e-2, -1.8373332003235559e-2, -1.3924550899656622e-2, -9.0432717929286065e-3, -3.9254538460401401e-3], [3.6378722131408271e-5, 1.4270115114976107e-4, 4.1707305591360998e-4, 9.3078927411211054e-4, 1.6982405552763209e-3, 2.6410389898960105e-3, 3.6020100634892597e-3, 4.3948694418028894e-3, 4.8592361502885691e-3, 4.8969195735718400e-3, 4.4822477993889691e-3, 3.6527873384777180e-3, 2.4915361036748015e-3, 1.1109066619257451e-3], [-5.2247969214088263e-7, -3.5431726197787138e-6, -1.4986603921798377e-5, -4.5719942870605773e-5, -1.0927042791389368e-4, -2.1467168701659943e-4, -3.5804369951174728e-4, -5.1851294342861748e-4, -6.6181708627297811e-4, -7.5015435652850586e-4, -7.5360570995103959e-4, -6.5858942214340710e-4, -4.7115945765550394e-4, -2.1566655517430002e-4], [7.6126317537383133e-9, 8.1750235208738773e-8, 4.8053902015613351e-7, 1.9343928721473813e-6, 5.8748655903188236e-6, 1.4218977882590084e-5, 2.8423622491580389e-5, 4.8096622495214759e-5, 7.0032119251206162e-5, 8.8509889197412545e-5, 9.6992593696619416e-5, 9.0522464456352691e-5, 6.7749440692058709e-5, 3.1794519686431434e-5], [-1.1067208401558380e-10, -1.7827040215485579e-9, -1.4138671347142820e-8, -7.3157550013439338e-8, -2.7602428583237125e-7, -8.0733700536077683e-7, -1.9034288996951365e-6, -3.7144135178559187e-6, -6.1058709188547045e-6, -8.5353238912936222e-6, -1.0141493251433653e-5, -1.0064805029899024e-5, -7.8584496318654933e-6, -3.7754404880795070e-6], [1.5941180800588545e-12, 3.7147231665556589e-11, 3.8825599899658110e-10, 2.5297806341848092e-9, 1.1647051096070378e-8, 4.0532024859458289e-8, 1.1121594563274012e-7, 2.4750664356545855e-7, 4.5513453780107989e-7, 6.9857773558435633e-7, 8.9492360470990307e-7, 9.4056042743474768e-7, 7.6402316250055317e-7, 3.7520987498879127e-7], [-2.2701136811086821e-14, -7.4507818713344920e-13, -1.0065332602365558e-11, -8.1207305751373995e-11, -4.4950018899134536e-10, -1.8370510506567675e-9, -5.8003168783825637e-9, -1.4579002773319787e-8, -2.9747737759536366e-8, -4.9803839624162097e-8, -6.8433737642280190e-8, -7.5873787856356113e-8, -6.3953565416188646e-8, -3.2058859955813833e-8], [3.1950551928382385e-16, 1.4459969437354087e-14, 2.4836947854473175e-13, 2.4461171638320078e-12, 1.6074039989404729e-11, 7.6287967478496479e-11, 2.7445251993138727e-10, 7.7248892062874625e-10, 1.7363843430071212e-9, 3.1520288572738391e-9, 4.6234390932645005e-9, 5.3882731054903742e-9, 4.7012226840231224e-9, 2.4022761564415093e-9], [-4.4469812870632465e-18, -2.7259861918761378e-16, -5.8693412774609452e-15, -6.9696948459303837e-14, -5.3776903138830448e-13, -2.9349464139994857e-12, -1.1926445791069343e-11, -3.7306117849557978e-11, -9.1775869021493311e-11, -1.7965711593955309e-10, -2.8008295671044044e-10, -3.4197223301264532e-10, -3.0813915918790758e-10, -1.6030161471344876e-10], [6.1250376164958348e-20, 5.0072002747937763e-18, 1.3346189042596861e-16, 1.8901173939623914e-15, 1.6957953626214205e-14, 1.0550104618146105e-13, 4.8049097222794781e-13, 1.6589073845698305e-12, 4.4401337372901683e-12, 9.3266024962613004e-12, 1.5391619044405369e-11, 1.9627802373918481e-11, 1.8226280111950209e-11, 9.6417186387624195e-12], [-8.3552586050188988e-22, -8.9833722926094385e-20, -2.9311101423631628e-18, -4.9026014472672940e-17, -5.0700962414730745e-16, -3.5674902169765923e-15, -1.8082239537315166e-14, -6.8478539158704366e-14, -1.9833915311820507e-13, -4.4500510869991717e-13, -7.7451767207992671e-13, -1.0286401626878604e-12, -9.8242716697407857e-13, -5.2789004734553277e-13], [1.1295423989403746e-23, 1.5773167978711472e-21, 6.2364044457616187e-20, 1.2210834357002846e-18, 1.4440898402896287e-17, 1.1410348618594746e-16, 6.3953311845853369e-16, 2.6415515522427028e-15, 8.2383504259773859e-15, 1.9660718333751414e-14, 3.5964950747303088e-14, 4.9614357520093955e-14, 4.8646878164375114e-14, 2.6523979333437575e-14], [-1.5140908811467089e-25, -2.7140993961206592e-23, -1.2881926557051937e-21, -2.9284271413050622e-20, -3.9312312382809858e-19, -3.4648318509337909e-18, -2.1345057603399663e-17, -9.5641653534749085e-17, -3.1967270610984271e-16, -8.0819903215386302e-16, -1.5487323141515275e-15, -2.2135485983452071e-15, -2.2241870047413242e-15, -1.2293107801996524e-15]],
        [[1.0230767297226211e-1, 9.3786244517546709e-2, 7.9038441879910593e-2, 6.1581996062138436e-2, 4.4727313391763096e-2, 3.0603804239016923e-2, 1.9969561241040954e-2, 1.2587990898899411e-2, 7.7587000699865803e-3, 4.7180985377555009e-3, 2.8361880283220782e-3, 1.6624650509232487e-3, 8.9860778383079108e-4, 3.5147299613611653e-4], [-2.3904560887841775e-3, -4.2752127983502308e-3, -7.0812770738536517e-3, -9.5054697976168182e-3, -1.0641664330185530e-2, -1.0316499287148054e-2, -8.9307535494675922e-3, -7.0778282187731523e-3, -5.2404501639348713e-3, -3.6799459063517030e-3, -2.4678786350899576e-3, -1.5657195120146016e-3, -8.9183048562171767e-4, -3.5881103129967428e-4], [3.0772924164391010e-5, 1.0699408246105785e-4, 2.7544629205166807e-4, 5.2846837422040234e-4, 8.0840744132100236e-4, 1.0302797247168053e-3, 1.1308312545893037e-3, 1.0982987670977144e-3, 9.6512697963032480e-4, 7.8032736717350796e-4, 5.8536557849086715e-4, 4.0407566362337218e-4, 2.4383311107582797e-4, 1.0127238305303132e-4], [-4.1650345808317650e-7, -2.4782178738822798e-6, -9.1357276739364132e-6, -2.3815276472995598e-5, -4.7672654128164028e-5, -7.7028609130360712e-5, -1.0418196675696462e-4, -1.2139107802697887e-4, -1.2470805519388591e-4, -1.1492644036169169e-4, -9.5830982233837179e-5, -7.1719287132606058e-5, -4.5766571918778856e-5, -1.9608240817287285e-5], [5.7356917405891556e-9, 5.3557883030801278e-8, 2.7204842707493837e-7, 9.3169732840395945e-7, 2.3688108487983388e-6, 4.7307616896618100e-6, 7.7199370873166712e-6, 1.0609485673653880e-5, 1.2573872775527515e-5, 1.3075659302060718e-5, 1.2031599628956266e-5, 9.7135930766533320e-6, 6.5345041767816987e-6, 2.8833022307848342e-6], [-7.9018138325220256e-11, -1.0970846623514055e-9, -7.4681733889937167e-9, -3.2768211069106287e-8, -1.0350284876709606e-7, -2.5060781103551599e-7, -4.8530983770656079e-7, -7.7575513459023977e-7, -1.0485531011510610e-6, -1.2192436816459341e-6, -1.2293795585871494e-6, -1.0652803448226498e-6, -7.5293457941915176e-7, -3.4153587256713018e-7], [1.0805548473240935e-12, 2.1524391788097063e-11, 1.9203871287364911e-10, 1.0584928259193796e-9, 4.0817593400085536e-9, 1.1797739271314086e-8, 2.6745452337431226e-8, 4.9143911467655330e-8, 7.5007926961110939e-8, 9.6730763053274264e-8, 1.0619163464683859e-7, 9.8286238945323648e-8, 7.2748370333328131e-8, 3.3862877071703150e-8], [-1.4628958050199459e-14, -4.0729815442744160e-13, -4.6757997936639332e-12, -3.1857713182473613e-11, -1.4783396869803239e-10, -5.0351863688885480e-10, -1.3209426736129114e-9, -2.7619385413863366e-9, -4.7187699887250423e-9, -6.6998231689951474e-9, -7.9607536406593857e-9, -7.8348105378337028e-9, -6.0541139044569525e-9, -2.8868707313929661e-9], [1.9592466027156059e-16, 7.4701155549986034e-15, 1.0863773727735275e-13, 9.0255648613075998e-13, 4.9786147128277545e-12, 1.9761587312697482e-11, 5.9397565107446300e-11, 1.4007098590697996e-10, 2.6580873159361301e-10, 4.1277718639576455e-10, 5.2799410823875160e-10, 5.5026241056493916e-10, 4.4261536934332379e-10, 2.1586304880896772e-10], [-2.5969744518317202e-18, -1.3328619580984328e-16, -2.4226075752247565e-15, -2.4253604806879572e-14, -1.5734434984282624e-13, -7.2081070674009806e-13, -2.4604973405205601e-12, -6.4926269421050024e-12, -1.3590108109479898e-11, -2.2944831317249432e-11, -3.1439629853360425e-11, -3.4563547942328031e-11, -2.8862978131847145e-11, -1.4375176099406258e-11], [3.4083872443642414e-20, 2.3202780959993584e-18, 5.2084982672242621e-17, 6.2182921168187191e-16, 4.6998564955842964e-15, 2.4635713861654717e-14, 9.4755851239597651e-14, 2.7780330327886549e-13, 6.3735897090003589e-13, 1.1635780626291066e-12, 1.7002023156061526e-12, 1.9647315954944174e-12, 1.6990578108450728e-12, 8.6296011090185664e-13], [-4.4329107442560002e-22, -3.9499867897228236e-20, -1.0834694618858634e-18, -1.5281948137462661e-17, -1.3342867655776454e-16, -7.9408811812365618e-16, -3.4171482951302380e-15, -1.1059396790379461e-14, -2.7652074678052651e-14, -5.4315213626034264e-14, -8.4280891463438699e-14, -1.0204024912144539e-13, -9.1170216725770542e-14, -4.7160587985616997e-14], [5.7161122079885314e-24, 6.5882586939599196e-22, 2.1870067065411090e-20, 3.6135452974668233e-19, 3.6167591234956163e-18, 2.4266807032807013e-17, 1.1607811116710673e-16, 4.1228452432503483e-16, 1.1175197845938429e-15, 2.3509170397393115e-15, 3.8590161306401826e-15, 4.8802512248673888e-15, 4.4953858506563123e-15, 2.3654289212471421e-15], [-7.3146028666071762e-26, -1.0780375718308816e-23, -4.2923248376217229e-22, -8.2428386140450005e-21, -9.3899317897033965e-20, -7.0559856248967653e-19, -3.7289926136804675e-18, -1.4454330812399788e-17, -4.2261242071811390e-17, -9.4799552619107734e-17, -1.6401068715882842e-16, -2.1601850125510047e-16, -2.0471794293049114e-16, -1.0944714999967989e-16]],
        [[9.7758144506267168e-2, 8.6006887323437748e-2, 6.6777955801072114e-2, 4.6044728786390181e-2, 2.8468971791443155e-2, 1.5994180954281675e-2, 8.3039758208732286e-3, 4.0657190544196232e-3, 1.9202038661429386e-3, 8.9502869854617221e-4, 4.1943660638362824e-4, 1.9848333151302540e-4, 9.1267077536339272e-5, 3.2459411518336722e-5], [-2.1628163496492624e-3, -3.5251495229580440e-3, -5.2521446568112636e-3, -6.2095731464433333e-3, -5.9469903614050369e-3, -4.7853118311571473e-3, -3.3458263656826638e-3, -2.0964902373877661e-3, -1.2123291025992230e-3, -6.6489303014306617e-4, -3.5353243403864511e-4, -1.8358489622124228e-4, -8.9836402410959209e-5, -3.3048177289520241e-5], [2.6277569280590635e-5, 8.1754330761507534e-5, 1.8770977424148985e-4, 3.1426514204908883e-4, 4.0948087637928584e-4, 4.3396239060023205e-4, 3.8751129229677706e-4, 3.0098775173977631e-4, 2.0953062555942169e-4, 1.3438034116442957e-4, 8.1151699939755212e-5, 4.6470411405565064e-5, 2.4338834593478214e-5, 9.2989153414850314e-6], [-3.3609379133753230e-7, -1.7722000844210741e-6, -5.7657953413618945e-6, -1.3024199246914652e-5, -2.2149235451915020e-5, -2.9808889324164137e-5, -3.2986739390288062e-5, -3.1022329332837469e-5, -2.5549748105222486e-5, -1.8930127458503200e-5, -1.2881861543838877e-5, -8.0969098483841706e-6, -4.5280944697898367e-6, -1.7949438598210588e-6], [4.3848099798504839e-9, 3.5981167212436847e-8, 1.5990359212613450e-7, 4.7209597636755274e-7, 1.0178678045847413e-6, 1.6958796091159312e-6, 2.2756073007279663e-6, 2.5445776342464278e-6, 2.4431714983438731e-6, 2.0673322360720414e-6, 1.5717163113526610e-6, 1.0778558943616244e-6, 6.4114832203401516e-7, 2.6316252977694442e-7], [-5.7369529473892099e-11, -6.9420767495045336e-10, -4.1056978721155328e-9, -1.5467784308132372e-8, -4.1383557816797953e-8, -8.3742311170159269e-8, -1.3397525484334692e-7, -1.7553526192854307e-7, -1.9405993033258434e-7, -1.8562962058588088e-7, -1.5640442176393272e-7, -1.1632555929497971e-7, -7.3301923738318288e-8, -3.1085088406290068e-8], [7.4634003075681670e-13, 1.2855753323130245e-11, 9.9080210082459623e-11, 4.6744092019335756e-10, 1.5259053769725930e-9, 3.6933474356018789e-9, 6.9486731930379468e-9, 1.0537874280762967e-8, 1.3271836851703321e-8, 1.4222524393610226e-8, 1.3183244275028537e-8, 1.0573934275166283e-8, 7.0310404935733610e-9, 3.0738499241045617e-9], [-9.6259173574578489e-15, -2.3002914213959750e-13, -2.2702739074942993e-12, -1.3207778150077062e-11, -5.1878322060625510e-11, -1.4829670591802262e-10, -3.2432461363049693e-10, -5.6337301225084767e-10, -8.0084143090293413e-10, -9.5376192697204336e-10, -9.6612187984788669e-10, -8.3131962242458845e-10, -5.8116150813853564e-10, -2.6138952329118593e-10], [1.2291982551949698e-16, 3.9955904692565128e-15, 4.9755833583705808e-14, 3.5233056394384507e-13, 1.6455945349738674e-12, 5.4953567778178552e-12, 1.3831306562922746e-11, 2.7269383649359891e-11, 4.3394226032731969e-11, 5.7022875994450188e-11, 6.2741591294356795e-11, 5.7640621577845502e-11, 4.2220034661265448e-11, 1.9498311823714032e-11], [-1.5547790063502487e-18, -6.7611300498069285e-17, -1.0487509085310857e-15, -8.9378002516395313e-15, -4.9130421414106013e-14, -1.8985472747824695e-13, -5.4510937647127479e-13, -1.2099669720101235e-12, -2.1396701908628358e-12, -3.0822461300139250e-12, -3.6634449640433857e-12, -3.5775294364566944e-12, -2.7369032390363669e-12, -1.2955139667957292e-12], [1.9480932408558134e-20, 1.1176012378609818e-18, 2.1350792785718247e-17, 2.1681793260793605e-16, 1.3899742212065382e-15, 6.1632169989332433e-15, 2.0028680447378151e-14, 4.9689318468795835e-14, 9.7000337071172079e-14, 1.5227672759543359e-13, 1.9452592287420645e-13, 2.0110713628658840e-13, 1.6022062495700691e-13, 7.7603045311266037e-14], [-2.4204390509197648e-22, -1.8085796133482345e-20, -4.2124977620078197e-19, -5.0520206768756608e-18, -3.7464326032617350e-17, -1.8916804587413448e-16, -6.9086766468503329e-16, -1.9031168978378321e-15, -4.0765373947608476e-15, -6.9366174259174243e-15, -9.4797766496133799e-15, -1.0336609832152492e-14, -8.5527840986250893e-15, -4.2322562973602045e-15], [2.9823002597127834e-24, 2.8704487572087129e-22, 8.0768669736751425e-21, 1.1347386082771247e-19, 9.6619932557052724e-19, 5.5172691035050480e-18, 2.2499144938375706e-17, 6.8404129990106784e-17, 1.5989031118798957e-16, 2.9344071579676644e-16, 4.2718874542970121e-16, 4.8958377465800872e-16, 4.1966793333868620e-16, 2.1186043308038558e-16], [-3.6493297121202922e-26, -4.4737469167487269e-24, -1.5078845205105069e-22, -2.4631036240743232e-21, -2.3914788492774248e-20, -1.5344076712378532e-19, -6.9444186053538932e-19, -2.3170005092572630e-18, -5.8789190341062979e-18, -1.1581932052348093e-17, -1.7887456342177323e-17, -2.1475177196920133e-17, -1.9024529200129406e-17, -9.7843919372196961e-18]],
        [[9.3630748919563937e-2, 7.9549554653177813e-2, 5.7583302321653579e-2, 3.5722090036242028e-2, 1.9170000814805266e-2, 9.0203772532834326e-3, 3.7911069856630873e-3, 1.4578979030522864e-3, 5.2863105137940133e-4, 1.8715582883646217e-4, 6.7060207644140973e-5, 2.4966673802573654e-5, 9.5206572568455062e-6, 3.0255200246450383e-6], [-1.9676169323978745e-3, -2.9473497931152978e-3, -3.9892276639955649e-3, -4.2122971393376510e-3, -3.5095020319116835e-3, -2.3849529476141987e-3, -1.3672496953929050e-3, -6.8394589232607114e-4, -3.0936390910879452e-4, -1.3141638934904228e-4, -5.4431792587342738e-5, -2.2595485008201057e-5, -9.2786474860732274e-6, -3.0707219846263149e-6], [2.2630441708147788e-5, 6.3532832385271603e-5, 1.3152759662515719e-4, 1.9476604816867405e-4, 2.1940677498124956e-4, 1.9624609105641538e-4, 1.4437021249044123e-4, 9.0370716275544779e-5, 4.9858556851505160e-5, 2.5153838570416889e-5, 1.2026915595871459e-5, 5.5894820607453004e-6, 2.4864921735578501e-6, 8.6092588766862055e-7], [-2.7422698438278859e-7, -1.2927667271554811e-6, -3.7538202984142772e-6, -7.4420778808179473e-6, -1.0899473709915162e-5, -1.2378621767172767e-5, -1.1327402630426865e-5, -8.6496807616532979e-6, -5.7070444747694463e-6, -3.3705805599999037e-6, -1.8423176170417495e-6, -9.5288356369020126e-7, -4.5775376585570856e-7, -1.6559443125504022e-7], [3.3968051226464252e-9, 2.4726825369702673e-8, 9.7220600687815475e-8, 2.5048138155951034e-7, 4.6374954153111013e-7, 6.5210677295908842e-7, 7.2599032744096269e-7, 6.6347519640795877e-7, 5.1520195452607609e-7, 3.5161503847513305e-7, 2.1751370983882693e-7, 1.2430041633018784e-7, 6.4177826514326284e-8, 2.4196106638246584e-8], [-4.2294013095664245e-11, -4.5048639206909744e-10, -2.3404467600164726e-9, -7.6596828858506587e-9, -1.7560117566511142e-8, -3.0003929553009159e-8, -3.9955098585642444e-8, -4.3043448523115699e-8, -3.8818641208398341e-8, -3.0271065757779095e-8, -2.0999443030810114e-8, -1.3165452519853469e-8, -7.2701817512955955e-9, -2.8488876072117266e-9], [5.2443084488151933e-13, 7.8926091633470456e-12, 5.3121724465107433e-11, 2.1691350398865475e-10, 6.0582894156841829e-10, 1.2391603899455061e-9, 1.9468689949027254e-9, 2.4415714450716468e-9, 2.5286920937401479e-9, 2.2310143581627588e-9, 1.7212369319061056e-9, 1.1761370775831671e-9, 6.9140665162402596e-10, 2.8085548761551202e-10], [-6.4562031763967676e-15, -1.3383032047961359e-13, -1.1477550215540130e-12, -5.7622344311660633e-12, -1.9345958586057923e-11, -4.6785434207454989e-11, -8.5729140039367445e-11, -1.2383009051330763e-10, -1.4585293592061587e-10, -1.4433316983212326e-10, -1.2291943496323674e-10, -9.0993318752360791e-11, -5.6696438248828604e-11, -2.3814282727808353e-11], [7.8746544782089578e-17, 2.2060889493167394e-15, 2.3770767584757869e-14, 1.4491722959731817e-13, 5.7825470614660247e-13, 1.6359983931838262e-12, 3.4617690200165812e-12, 5.7059972090163175e-12, 7.5780980251335800e-12, 8.3462501483853036e-12, 7.7935130489312896e-12, 6.2158271199382869e-12, 4.0884852829355209e-12, 1.7715895327100872e-12], [-9.5233697789714756e-19, -3.5471572073921677e-17, -4.7437201350818836e-16, -3.4742264200367019e-15, -1.6314205388832758e-14, -5.3500402173425920e-14, -1.2959375410505199e-13, -2.4176317322421816e-13, -3.5928518423001002e-13, -4.3734503728440811e-13, -4.4503574967679884e-13, -3.8049098893266292e-13, -2.6321337217940905e-13, -1.1740539943118081e-13], [1.1410462223104535e-20, 5.5776946065770402e-19, 9.1587394231595435e-18, 7.9819738693215907e-17, 4.3724897686856308e-16, 1.6484728459356159e-15, 4.5357134162757387e-15, 9.5067398509300597e-15, 1.5700377419016357e-14, 2.0989616333649339e-14, 2.3146135392880605e-14, 2.1115421337795329e-14, 1.5309907985521238e-14, 7.0155746941048469e-15], [-1.3570759524781995e-22, -8.5951846860042037e-21, -1.7162952488269060e-19, -1.7648367998878608e-18, -1.1189855247506985e-17, -4.8142777766602531e-17, -1.4941217341444663e-16, -3.4951079337281019e-16, -6.3745414468834800e-16, -9.3056720653263990e-16, -1.1063740154625355e-15, -1.0723692297357783e-15, -8.1236506271762501e-16, -3.8172393065021844e-16], [1.5999236244529788e-24, 1.3002325610320542e-22, 3.1298601141693277e-21, 3.7680960527045711e-20, 2.7456643417745181e-19, 1.3390280345328128e-18, 4.6575711020407879e-18, 1.2085962064520053e-17, 2.4204087491865765e-17, 3.8378820229087727e-17, 4.8964350302311841e-17, 5.0226943019388368e-17, 3.9637618497269231e-17, 1.9066489302724750e-17], [-1.8762155075361513e-26, -1.9332250483026822e-24, -5.5647438321399708e-23, -7.7877849281134936e-22, -6.4782748727491596e-21, -3.5588129314958621e-20, -1.3790463838428162e-19, -3.9468563307544701e-19, -8.6320297062252121e-19, -1.4791978383032341e-18, -2.0159982195090555e-18, -2.1803315308600421e-18, -1.7874548821807507e-18, -8.7871484992678919e-19]],
        [[8.9866750394949098e-2, 7.4118327330844073e-2, 5.0530997575209090e-2, 2.8614254139969154e-2, 1.3566269516009305e-2, 5.4506748005073737e-3, 1.8888518717309888e-3, 5.7872750821368672e-4, 1.6215876678574791e-4, 4.3410295982840654e-5, 1.1695354402348577e-5, 3.3365084668385300e-6, 1.0252355880242177e-6, 2.8506366300259000e-7], [-1.7988724925718564e-3, -2.4950379042734316e-3, -3.0939022939194562e-3, -2.9533011927838759e-3, -2.1736240479519680e-3, -1.2687392751949203e-3, -6.0606914763128931e-4, -2.4507824547738682e-4, -8.7197114813929320e-5, -2.8569848593421827e-5, -9.0790159378387832e-6, -2.9412585153349453e-6, -9.8713675738574115e-7, -2.8824739189641624e-7], [1.9639955901109748e-5, 5.0126258374001907e-5, 9.4468093405795526e-5, 1.2523814248500466e-4, 1.2367663361579471e-4, 9.4733680129752399e-5, 5.8202099789741354e-5, 2.9663161191841165e-5, 1.3022346643566045e-5, 5.1437719436732379e-6, 1.9192329673179210e-6, 7.0794468023438035e-7, 2.6107276958815466e-7, 8.0474558435586517e-8], [-2.2601800372541062e-7, -9.6006765918324523e-7, -2.5130515067449835e-6, -4.4237886237014064e-6, -5.6515825830231435e-6, -5.4876605273870336e-6, -4.2016190542667707e-6, -2.6269615383740899e-6, -1.3921178925294339e-6, -6.5187639033629536e-7, -2.8219390344480257e-7, -1.1762024600491859e-7, -4.7460690982909752e-8, -1.5414910931906902e-8], [2.6634933877700934e-9, 1.7344523978002990e-8, 6.0943194251278278e-8, 1.3856565108035260e-7, 2.2294659809966324e-7, 2.6771735208955247e-7, 2.4981476351315394e-7, 1.8785336489322902e-7, 1.1812230779289552e-7, 6.4632363987898445e-8, 3.2087867760589031e-8, 1.4982001742332592e-8, 6.5762421601661430e-9, 2.2435092445366441e-9], [-3.1621004864424527e-11, -2.9909599942972189e-10, -1.3787899383800733e-9, -3.9626325195876000e-9, -7.8716627352784081e-9, -1.1477878920908990e-8, -1.2834770004524339e-8, -1.1429715083796964e-8, -8.4096023724197111e-9, -5.3111106298622039e-9, -2.9927287614356983e-9, -1.5523834586922123e-9, -7.3688462671101735e-10, -2.6317192890483216e-10], [3.7434803222340908e-13, 4.9686146398617328e-12, 2.9496533887510718e-11, 1.0533944754201189e-10, 2.5435694433376306e-10, 4.4387773313593930e-10, 5.8678546600588481e-10, 6.1103497967211356e-10, 5.1992948848249302e-10, 3.7500906064818808e-10, 2.3762745511861888e-10, 1.3590401576591636e-10, 6.9374477020079732e-11, 2.5853696326824244e-11], [-4.4072272235297872e-15, -8.0003954452128436e-14, -6.0211571082803421e-13, -2.6349029191744829e-12, -7.6352727924639469e-12, -1.5756391785450237e-11, -2.4346355127342742e-11, -2.9329032770107422e-11, -2.8571874009232438e-11, -2.3318074550656547e-11, -1.6479098377556456e-11, -1.0319776075666547e-11, -5.6358187848311301e-12, -2.1849498603084223e-12], [5.1421724594769405e-17, 1.2539804179809595e-15, 1.1805407825388919e-14, 6.2559879840253404e-14, 2.1519863711212847e-13, 5.1980048864462616e-13, 9.2969571695249920e-13, 1.2836313556526022e-12, 1.4190908787738960e-12, 1.2997091061361090e-12, 1.0168347159690019e-12, 6.9287683966688098e-13, 4.0289691455720756e-13, 1.6203697587304440e-13], [-5.9580304942670453e-19, -1.9194010631434193e-17, -2.2342023181536543e-16, -1.4191212371444950e-15, -5.7403873125760609e-15, -1.6085069875487059e-14, -3.3017259352167156e-14, -5.1821471571700307e-14, -6.4505965997498163e-14, -6.5813182233232968e-14, -5.6619520906079625e-14, -4.1739671026551392e-14, -2.5729926105858463e-14, -1.0706878760780950e-14], [6.8339153567216727e-21, 2.8760972925634612e-19, 4.0971227754857138e-18, 3.0912072321184413e-17, 1.4581221025876619e-16, 4.7023603094235336e-16, 1.0993597245578132e-15, 1.9470891420708378e-15, 2.7097519278599048e-15, 3.0592842461259929e-15, 2.8765393114220416e-15, 2.2821857989735614e-15, 1.4854121688907187e-15, 6.3801776388090375e-16], [-7.8005122837405846e-23, -4.2274472042720160e-21, -7.3026624012825914e-20, -6.4917506067189787e-19, -3.5441269086791353e-18, -1.3060877181212595e-17, -3.4539607448764265e-17, -6.8572744628047345e-17, -1.0601397660621314e-16, -1.3163973076893016e-16, -1.3452666882571744e-16, -1.1431289249100142e-16, -7.8269470055938338e-17, -3.4624147540801268e-17], [8.7980326965202074e-25, 6.1049830788486809e-23, 1.2682786886537291e-21, 1.3186574048007511e-20, 8.2755648138604833e-20, 3.4624386317478852e-19, 1.0292655287075244e-18, 2.2767231876055376e-18, 3.8872194367639109e-18, 5.2792292880381034e-18, 5.8335413471925314e-18, 5.2856643699489707e-18, 3.7941884100013987e-18, 1.7251271838659522e-18], [-9.9503533752127482e-27, -8.6726170541838327e-25, -2.1500912730735337e-23, -2.5968562601416518e-22, -1.8615323822831617e-21, -8.7889548979081110e-21, -2.9196069648120810e-20, -7.1542192908812985e-20, -1.3414908471628160e-19, -1.9820529838731771e-19, -2.3565957767988378e-19, -2.2671897147014852e-19, -1.7006319053546446e-19, -7.9319175520698236e-20]],
        [[8.6418017957486058e-2, 6.9495833861736447e-2, 4.5013903047650058e-2, 2.3564581882358229e-2, 1.0029759416510641e-2, 3.5044197650306967e-3, 1.0203244874771292e-3, 2.5324719256203148e-4, 5.5424899531914832e-5, 1.1225506348686851e-5, 2.2449074473036898e-6, 4.7820712006261157e-7, 1.1467326449144911e-7, 2.7202216622928526e-8], [-1.6519223273362752e-3, -2.1358093824012449e-3, -2.4440789751949536e-3, -2.1312886929565497e-3, -1.4049669297342177e-3, -7.1577206646673463e-4, -2.8966423639948008e-4, -9.6077749419258837e-5, -2.7141027447797110e-5, -6.8612559720445658e-6, -1.6534794469809670e-6, -4.0834377412948656e-7, -1.0878042092812148e-7, -2.7383691999320529e-8], [1.7164039497882187e-5, 4.0092203758354835e-5, 6.9362613132868286e-5, 8.3224687292263962e-5, 7.2970076361909763e-5, 4.8540964596090866e-5, 2.5259198500095607e-5, 1.0609701025136740e-5, 3.7336076192861262e-6, 1.1538028930898390e-6, 3.3213714081793171e-7, 9.5137303890019382e-8, 2.8313960628790818e-8, 7.6069411559254890e-9], [-1.8801216850232352e-7, -7.2461908349739804e-7, -1.7251526262972828e-6, -2.7249416724909824e-6, -3.0730120197620260e-6, -2.5837791476229370e-6, -1.6758514740620387e-6, -8.6673679934129759e-7, -3.7098759452127085e-7, -1.3748347080164191e-7, -4.6600925546518535e-8, -1.5333269822503751e-8, -5.0697356398562471e-9, -1.4500117937183403e-9], [2.1118044660738858e-9, 1.2394610194361066e-8, 3.9273716557213991e-8, 7.9614457299232530e-8, 1.1257907383039069e-7, 1.1679497979661846e-7, 9.2351338293115144e-8, 5.7635088398885467e-8, 2.9467014698583269e-8, 1.2889908097585868e-8, 5.0770982984307897e-9, 1.8992578131892339e-9, 6.9264900004715141e-10, 2.1006243176755204e-10], [-2.3949625569222886e-11, -2.0276341320109764e-10, -8.3693460413539106e-10, -2.1334730733787160e-9, -3.7115310602609672e-9, -4.6678821983573225e-9, -4.4256093252483514e-9, -3.2813052666197949e-9, -1.9750928177493786e-9, -1.0064621744772757e-9, -4.5535218230995222e-10, -1.9181089074561162e-10, -7.6610849726440945e-11, -2.4534143694773858e-11], [2.7109872889422748e-13, 3.2003600614637128e-12, 1.6910717925520781e-11, 5.3333916189948612e-11, 1.1246196758016164e-10, 1.6908534430278878e-10, 1.8968140905881520e-10, 1.6497784603800829e-10, 1.1551426077576781e-10, 6.7804728956529671e-11, 3.4879509053505001e-11, 1.6401068427127859e-11, 7.1266548984793649e-12, 2.4003934856776906e-12], [-3.0581951614978488e-15, -4.9030072657693265e-14, -3.2675842843669050e-13, -1.2581740416268829e-12, -3.1766721643975062e-12, -5.6440507049834141e-12, -7.4091368100278846e-12, -7.4792662307478562e-12, -6.0294134241904305e-12, -4.0371206303512724e-12, -2.3400519201193059e-12, -1.2186771379939230e-12, -5.7258525296163584e-13, -2.0208785020671512e-13], [3.4167000393691471e-17, 7.3205916423170436e-16, 6.0757312359205586e-15, 2.8242176729298942e-14, 8.4499076659656715e-14, 1.7567604253411142e-13, 2.6731546594862658e-13, 3.1031185413905604e-13, 2.8544709121811468e-13, 2.1614756054928662e-13, 1.4003842542416956e-13, 8.0201446499479547e-14, 4.0517140742187850e-14, 1.4933241162566405e-14], [-3.8029530031635328e-19, -1.0685618752333602e-17, -1.0922258490571589e-16, -6.0697127298247022e-16, -2.1326896150502543e-15, -5.1440042075773739e-15, -8.9977917444043004e-15, -1.1914135831878837e-14, -1.2406414418309669e-14, -1.0542710935288426e-14, -7.5794546425824891e-15, -4.7428391067026537e-15, -2.5631568595193052e-15, -9.8341814427314046e-16], [4.1733008753507935e-21, 1.5283292856596664e-19, 1.9053237275031851e-18, 1.2549849514385570e-17, 5.1373100310531254e-17, 1.4266348218789762e-16, 2.8474375933305208e-16, 4.2694923114999090e-16, 4.9970378503311292e-16, 4.7323571114119215e-16, 3.7504932668968000e-16, 2.5491446955843992e-16, 1.4668117755630861e-16, 5.8415754308438458e-17], [-4.5995518394029451e-23, -2.1461781239327138e-21, -3.2346657560205446e-20, -2.5059111017645040e-19, -1.1865544840611306e-18, -3.7678177615842386e-18, -8.5238612767449383e-18, -1.4377960146572463e-17, -1.8791816190068048e-17, -1.9707869902791914e-17, -1.7114323999757239e-17, -1.2566874312881251e-17, -7.6662278192690090e-18, -3.1606590269466156e-18], [4.9211340808779832e-25, 2.9631706757666529e-23, 5.3572106080606674e-22, 4.8472613301055835e-21, 2.6376290542412936e-20, 9.5176673034884539e-20, 2.4256956751648737e-19, 4.5753693738071499e-19, 6.6382411950821431e-19, 7.6648723565311862e-19, 7.2532249138141328e-19, 5.7253914559943975e-19, 3.6882176465055160e-19, 1.5703413020657673e-19], [-5.4828086801160952e-27, -4.0279513921901690e-25, -8.6702808989602282e-24, -9.1033003901025943e-23, -5.6581833837672343e-22, -2.3065993921255815e-21, -6.5849117887190464e-21, -1.3810316999873470e-20, -2.2117631146189181e-20, -2.7961915043250488e-20, -2.8681681778761026e-20, -2.4222801455877901e-20, -1.6415327725089570e-20, -7.2010584914149776e-21]],
        [[8.3244723988850794e-2, 6.5519609568925609e-2, 4.0621873836947203e-2, 1.9877654752446988e-2, 7.7052281601402887e-3, 2.3815305336634070e-3, 5.9351830429795502e-4, 1.2151638411511367e-4, 2.1071572265405676e-5, 3.2476104711041106e-6, 4.7832919737831315e-7, 7.4278787572236978e-8, 1.3422837665354867e-8, 2.6353917072287478e-9], [-1.5230944273541790e-3, -1.8467653598802204e-3, -1.9624458040985268e-3, -1.5774771056167577e-3, -9.4290873246240120e-4, -4.2558713089697665e-4, -1.4832275245286889e-4, -4.1002822985967360e-5, -9.3125453276066403e-6, -1.8254935569745314e-6, -3.3123903456002394e-7, -6.1024265857414657e-8, -1.2500566355618846e-8, -2.6386718047632925e-9], [1.5095890541683476e-5, 3.2465181917190835e-5, 5.1942472241012253e-5, 5.6956757817181232e-5, 4.4855818314061726e-5, 2.6257939228956746e-5, 1.1737117082715623e-5, 4.1179505247898875e-6, 1.1735281650665786e-6, 2.8468528623657775e-7, 6.2754581447222693e-8, 1.3677869957943030e-8, 3.1909538927866700e-9, 7.2860281141785190e-10], [-1.5772876706925297e-7, -5.5499750976273881e-7, -1.2113884607961797e-6, -1.7332874575937061e-6, -1.7444730839499974e-6, -1.2855957051534434e-6, -7.1531134227973177e-7, -3.0958933178760844e-7, -1.0792082704976189e-7, -3.1709946841781316e-8, -8.3488681400593441e-9, -2.1269547718568070e-9, -5.6096373065597715e-10, -1.3807745162030013e-10], [1.6915283950227920e-9, 9.0085406541913363e-9, 2.5952349703722615e-8, 4.7344800268060892e-8, 5.9457255571866943e-8, 5.3895313027187823e-8, 3.6521339637932559e-8, 1.9105877354562091e-8, 7.9951264077548008e-9, 2.7973141507170496e-9, 8.6671931521598115e-10, 2.5497460547808950e-10, 7.5354498228505862e-11, 1.9893772466053116e-11], [-1.8358850952686185e-11, -1.4009916499513622e-10, -5.2206708453058696e-10, -1.1912755167199568e-9, -1.8331906530585783e-9, -2.0094862420237514e-9, -1.6318153971470937e-9, -1.0160171683649110e-9, -5.0290043684801370e-10, -2.0662299934910418e-10, -7.4385260329308546e-11, -2.4992033490549647e-11, -8.2060550374244449e-12, -2.3116014220607402e-12], [1.9892657236588471e-13, 2.1051032917281418e-12, 9.9830158394575032e-12, 2.8055976883766076e-11, 5.2158397919548955e-11, 6.8221106823688850e-11, 6.5538970282279738e-11, 4.7962924152422682e-11, 2.7741212722936371e-11, 1.3228396820737146e-11, 5.4725297702930322e-12, 2.0792718728174676e-12, 7.5254455791071620e-13, 2.2508537828826692e-13], [-2.1552640878303374e-15, -3.0741621602171446e-14, -1.8292699628986495e-13, -6.2522086510181365e-13, -1.3879950963597285e-12, -2.1423936311548194e-12, -2.4089225630028886e-12, -2.0504270190599595e-12, -1.3715534765397119e-12, -7.5141947277224005e-13, -3.5376995630047615e-13, -1.5066513367915353e-13, -5.9674746884239405e-14, -1.8865435047625853e-14], [2.3049902732110809e-17, 4.3798414196615692e-16, 3.2312150448410450e-15, 1.3287988469830086e-14, 3.4880041294455143e-14, 6.2938024565570363e-14, 8.2072006660821694e-14, 8.0519233800287497e-14, 6.1732167804215129e-14, 3.8512795083261448e-14, 2.0457549993879366e-14, 9.6885532943300321e-15, 4.1720048315625156e-15, 1.3882577375950216e-15], [-2.4779744933728104e-19, -6.1069495018544544e-18, -5.5263619600105054e-17, -2.7092960558644678e-16, -8.3370388137476031e-16, -1.7442392464987248e-15, -2.6167299894558976e-15, -2.9355343163198085e-15, -2.5590916468718079e-15, -1.8036761486156886e-15, -1.0726329702410766e-15, -5.6084573043491008e-16, -2.6100162125260395e-16, -9.1066847487589318e-17], [2.5811939650829280e-21, 8.3498401445454908e-20, 9.1843724288331944e-19, 5.3237699277240245e-18, 1.9059329705080697e-17, 4.5897964276656496e-17, 7.8652466051936656e-17, 1.0017814993928823e-16, 9.8595315159078356e-17, 7.7947504181659430e-17, 5.1533448759904231e-17, 2.9554531796750243e-17, 1.4783272822504263e-17, 5.3897005069525309e-18], [-2.8110012440684848e-23, -1.1220461278308767e-21, -1.4871846585158701e-20, -1.0118579541920981e-19, -4.1858097075942074e-19, -1.1526773535414251e-18, -2.2417727429254932e-18, -3.2209796647601769e-18, -3.5558290201271241e-18, -3.1328033272708079e-18, -2.2878720494854867e-18, -1.4305696128039883e-18, -7.6530876896820005e-19, -2.9061772672576350e-19], [2.7252963638455097e-25, 1.4829899075424329e-23, 2.3519815542167377e-22, 1.8657376861764463e-21, 8.8630394801699478e-21, 2.7743336570472189e-20, 6.0876884018382512e-20, 9.8090890703175254e-20, 1.2074622907963393e-19, 1.1784722655595359e-19, 9.4509314346549555e-20, 6.4077692373482883e-20, 3.6494670005489361e-20, 1.4392533376037200e-20], [-3.2161859105860651e-27, -1.9319682520126463e-25, -3.6382904771334406e-24, -3.3445153135095273e-23, -1.8139819387149539e-22, -6.4184512465047793e-22, -1.5802741399822599e-21, -2.8397160221396761e-21, -3.8758497670882680e-21, -4.1667550751447515e-21, -3.6489828230376209e-21, -2.6685746215030284e-21, -1.6110238202315915e-21, -6.5799679626604108e-22]],
        [[8.0313615946001445e-2, 6.2066310070554232e-2, 3.7070997447772986e-2, 1.7120519793071534e-2, 6.1217893673966015e-3, 1.7002124186656722e-3, 3.6925619191861957e-4, 6.3547601518447729e-5, 8.8812645463021596e-6, 1.0529099294851006e-6, 1.1400048558727117e-7, 1.2644947846545442e-8, 1.6593045919541315e-9, 2.6002535142000602e-10], [-1.4094645043868541e-3, -1.6114299238916399e-3, -1.5987104659494574e-3, -1.1937425045102362e-3, -6.5402656375117211e-4, -2.6513601231904561e-4, -8.0847550206345023e-5, -1.8939990364381950e-5, -3.5108529954118144e-6, -5.3869740761714100e-7, -7.3464178161202742e-8, -9.9133509242658581e-9, -1.5101784033479100e-9, -2.5862386290613112e-10], [1.3354202816944716e-5, 2.6585721896704646e-5, 3.9590541212077885e-5, 4.0020267828020335e-5, 2.8609124276724717e-5, 1.4919371592515132e-5, 5.8073957945642661e-6, 1.7260723996850145e-6, 4.0333111343540533e-7, 7.7366545202837784e-8, 1.3022251873438148e-8, 2.1223293095186428e-9, 3.7639688873769942e-10, 7.0891842137369563e-11], [-1.3336144624613996e-7, -4.3079823056390977e-7, -8.6821628386427397e-7, -1.1349799054018859e-6, -1.0297072683985039e-6, -6.7276488027712575e-7, -3.2512522575158665e-7, -1.1922102421744688e-7, -3.4202063183749403e-8, -8.0108077691184102e-9, -1.6318420419593852e-9, -3.1645647367455583e-10, -6.4710737862233003e-11, -1.3340619498376211e-11], [1.3676038060050563e-9, 6.6494600126484137e-9, 1.7545468372387112e-8, 2.9049538805550054e-8, 3.2714281375361692e-8, 2.6189000255333680e-8, 1.5381380422440600e-8, 6.8189783313909054e-9, 2.3559769607387419e-9, 6.6177098144750874e-10, 1.6049383125445157e-10, 3.6515997096792010e-11, 8.5168078957563834e-12, 1.9094820707221746e-12], [-1.4233019783300435e-11, -9.8504394627777134e-11, -3.3386727708841527e-10, -6.8768949936876081e-10, -9.4487221093946241e-10, -9.1187664625952099e-10, -6.4081509885248278e-10, -3.3828544355325738e-10, -1.3868689502732507e-10, -4.6048001084553430e-11, -1.3113899097401004e-11, -3.4571144888889146e-12, -9.1033054127726580e-13, -2.2052607223381585e-13], [1.4769354670556162e-13, 1.4115963010846092e-12, 6.0535661379763407e-12, 1.5285912689125838e-11, 2.5280852740358102e-11, 2.9039535465758319e-11, 2.4116873841740478e-11, 1.4975818904583495e-11, 7.1973264834089869e-12, 2.7909464402525068e-12, 9.2240897317001823e-13, 2.7865453849684613e-13, 8.2071802622275711e-14, 2.1351829310054560e-14], [-1.5426829363807875e-15, -1.9684473540418845e-14, -1.0537512691596901e-13, -3.2231293211438728e-13, -6.3461701122906280e-13, -8.5856323233988826e-13, -8.3400640531787999e-13, -6.0300096960883092e-13, -3.3625513142017181e-13, -1.5071849237036685e-13, -5.7217154868824699e-14, -1.9614153796326411e-14, -6.4073244930461295e-15, -1.7802141533379357e-15], [1.5720650371392964e-17, 2.6802803105158527e-16, 1.7712290545892888e-15, 6.4956839350366219e-15, 1.5083632698303843e-14, 2.3819212363441896e-14, 2.6826584043806717e-14, 2.2385757358724286e-14, 1.4355783041450691e-14, 7.3707831387865000e-15, 3.1850165181225971e-15, 1.2281259776050091e-15, 4.4158651417594420e-16, 1.3036292105696612e-16], [-1.6596789835699079e-19, -3.5760786876949302e-18, -2.8864076036145087e-17, -1.2581610511640456e-16, -3.4177086777711436e-16, -6.2505899926663143e-16, -8.0994295953525940e-16, -7.7403490123281377e-16, -5.6637420099606339e-16, -3.3043473942125636e-16, -1.6120741400003710e-16, -6.9369109659606706e-17, -2.7264669343334565e-17, -8.5127294042759674e-18], [1.5809577603610347e-21, 4.6797639604008484e-20, 4.5770823029449267e-19, 2.3525723747166064e-18, 7.4217102424557549e-18, 1.5611116241065806e-17, 2.3114466663415194e-17, 2.5124077461963139e-17, 2.0828467262072419e-17, 1.3708458311274642e-17, 7.4953168924761191e-18, 3.5735540456695590e-18, 1.5256775880981337e-18, 5.0168379678181547e-19], [-1.8336677987576299e-23, -6.0290013797817376e-22, -7.0778882710484064e-21, -4.2609462595965986e-20, -1.5510697979699613e-19, -3.7289960475959710e-19, -6.2700505677836096e-19, -7.7030684057223669e-19, -7.1891207428861239e-19, -5.3026584589534936e-19, -3.2276024426656059e-19, -1.6938340508935535e-19, -7.8102974371210516e-20, -2.6944156429810528e-20], [1.4965497137110070e-25, 7.6371648789612195e-24, 1.0703815339055406e-22, 7.4972461820058930e-22, 3.1304439158274409e-21, 8.5530362523566087e-21, 1.6239624566247738e-20, 2.2421992835707796e-20, 2.3419911640307077e-20, 1.9242601650813298e-20, 1.2958575059376127e-20, 7.4407193077289423e-21, 3.6860628574742537e-21, 1.3294316192851295e-21], [-1.4389386383306413e-27, -9.5359323420558291e-26, -1.5846346549016829e-24, -1.2840691808642543e-23, -6.1164002055023120e-23, -1.8890830551740181e-22, -4.0288271613466504e-22, -6.2178418615624672e-22, -7.2282810721804805e-22, -6.5777066940958156e-22, -4.8721474527271603e-22, -3.0433496286902065e-22, -1.6116770990674874e-22, -6.0567956073802742e-23]],
        [[7.7596701889227475e-2, 5.9040950664439809e-2, 3.4160372342730238e-2, 1.5015029337856173e-2, 5.0089334580917805e-3, 1.2679783749847434e-3, 2.4408489691504576e-4, 3.5981571296310145e-5, 4.1304789333573834e-6, 3.8243325301180073e-7, 3.0578317303969043e-8, 2.3868887798165235e-9, 2.1901022511428352e-10, 2.6233925312347714e-11], [-1.3086806949592203e-3, -1.4177524427770525e-3, -1.3193488946139040e-3, -9.2108739459391096e-4, -4.6692972016837217e-4, -1.7212547193748402e-4, -4.6613742834510814e-5, -9.4101303949341991e-6, -1.4476990974539756e-6, -1.7620200993624589e-7, -1.8130136042472438e-8, -1.7681993022876340e-9, -1.9365365591177354e-10, -2.5876717031485043e-11], [1.1876347679348832e-5, 2.1994967829577840e-5, 3.0659040461017733e-5, 2.8792485245341029e-5, 1.8861951698153421e-5, 8.8620525422010422e-6, 3.0433003972821543e-6, 7.7724876412422727e-7, 1.5101791751220427e-7, 2.3151770976026565e-8, 2.9818758286302867e-9, 3.5861076408059207e-10, 4.6867362147658519e-11, 7.0294010197119099e-12], [-1.1357820646251707e-7, -3.3849821732451015e-7, -6.3391281127152327e-7, -7.6297848199490081e-7, -6.2968017366872568e-7, -3.6862701261156300e-7, -1.5659118856490261e-7, -4.9271494133814571e-8, -1.1773173469013064e-8, -2.2170084383707241e-9, -3.4956927474295892e-10, -5.0915155511300695e-11, -7.8415116568625937e-12, -1.3115018345911354e-12], [1.1151628865586695e-9, 4.9780581923371698e-9, 1.2111430242911890e-8, 1.8339096726822696e-8, 1.8685092069988990e-8, 1.3344109215759433e-8, 6.8681740947748951e-9, 2.6097745142026891e-9, 7.5219155330509074e-10, 1.7076481544125749e-10, 3.2382500026876913e-11, 5.6209648536035922e-12, 1.0068521698720584e-12, 1.8622919638521633e-13], [-1.1154991517822509e-11, -7.0378090526883283e-11, -2.1843034210256274e-10, -4.0925252833256085e-10, -5.0642847298001948e-10, -4.3443717945100093e-10, -2.6691419855687518e-10, -1.2068956456449590e-10, -4.1345800309435891e-11, -1.1150595970297540e-11, -2.5062007318378337e-12, -5.1126316259605197e-13, -1.0523077883551532e-13, -2.1350123451385215e-14], [1.1072151993994396e-13, 9.6345797021605037e-13, 3.7624232075915257e-12, 8.6012901042814074e-12, 1.2761819593768097e-11, 1.2991549913362074e-11, 9.4156309570213661e-12, 5.0066905067087666e-12, 2.0144574855335450e-12, 6.3757689704923179e-13, 1.6776076878227988e-13, 3.9734520221585378e-14, 9.2956012708785193e-15, 2.0532136235752203e-15], [-1.1244740375296860e-15, -1.2852204504730521e-14, -6.2317341209620721e-14, -1.7187775383026319e-13, -3.0260684351712310e-13, -3.6193847322149982e-13, -3.0641013087700209e-13, -1.8972558486765528e-13, -8.8758072629139029e-14, -3.2627286426659736e-14, -9.9433771220988603e-15, -2.7052609437093761e-15, -7.1233591373892745e-16, -1.7012081363638719e-16], [1.0707588764007943e-17, 1.6745671775750343e-16, 9.9849327287849804e-16, 3.2897049093368933e-15, 6.8110520156677366e-15, 9.4899117090664973e-15, 9.3058952823214725e-15, 6.6530563733400621e-15, 3.5875333496557176e-15, 1.5178674249426710e-15, 5.3074916625198189e-16, 1.6429340895371759e-16, 4.8266305577739676e-17, 1.2385986855614735e-17], [-1.1691210373485075e-19, -2.1422824414735053e-18, -1.5523526113263784e-17, -6.0610768099955724e-17, -1.4645540418171767e-16, -2.3595602901714749e-16, -2.6605133833761041e-16, -2.1799014069287403e-16, -1.3445187971489554e-16, -6.4949754786843289e-17, -2.5839209529340105e-17, -9.0228198246671911e-18, -2.9340432524437613e-18, -8.0449119047490694e-19], [9.1918621858775627e-22, 2.6851083363034234e-20, 2.3528082647296097e-19, 1.0798959047297392e-18, 3.0239655449283594e-18, 5.5962569662266657e-18, 7.2081841036490471e-18, 6.7238588578947878e-18, 4.7109930717368778e-18, 2.5796068114505473e-18, 1.1587735124608081e-18, 4.5291892498366094e-19, 1.6185189171727451e-19, 4.7176382083603191e-20], [-1.1679901609361908e-23, -3.3203191619312405e-22, -3.4786079516415819e-21, -1.8659597300939946e-20, -6.0191579748985343e-20, -1.2719850912855060e-19, -1.8605468256265387e-19, -1.9640055718085064e-19, -1.5534109356184302e-19, -9.5785413257681132e-20, -4.8247769750728090e-20, -2.0959520579023551e-20, -8.1771862835848534e-21, -2.5220346155257507e-21], [1.6071852017799532e-25, 4.0553570116832259e-24, 5.0336940824633878e-23, 3.1360514995208826e-22, 1.1588058456249622e-21, 2.7811819998477067e-21, 4.5949082749971582e-21, 5.4588260016673966e-21, 4.8462470127678919e-21, 3.3447772748431768e-21, 1.8772126080147653e-21, 9.0048788129564946e-22, 3.8126107963215529e-22, 1.2390239730649243e-22], [2.4300014977220532e-27, -4.7844582943276913e-26, -7.1590941528888830e-25, -5.1389912227098267e-24, -2.1630007069187539e-23, -5.8657720063783809e-23, -1.0890763860537653e-22, -1.4485874019426598e-22, -1.4356688570895088e-22, -1.1027237708546437e-22, -6.8539969698771209e-23, -3.6080971920962441e-23, -1.6484381738762640e-23, -5.6222707009078153e-24]],
        [[7.5070238802866546e-2, 5.6369432652868887e-2, 3.1744983143016171e-2, 1.3377353697272939e-2, 4.2051822158844058e-3, 9.8280299339976401e-4, 1.7034726650662194e-4, 2.1909263557323570e-5, 2.1074941666060541e-6, 1.5526567731314152e-7, 9.2698933483465856e-9, 5.0535806236651468e-10, 3.1267838845400995e-11, 2.7206734181710395e-12], [-1.2188344111677722e-3, -1.2567859611889985e-3, -1.1015129184303908e-3, -7.2293877513960568e-4, -3.4185076002215925e-4, -1.1585873791543918e-4, -2.8253878650918358e-5, -4.9958288641573813e-6, -6.4926433310439332e-7, -6.3723063994985160e-8, -4.9947672120380475e-9, -3.4965901379861088e-10, -2.6657010292065170e-11, -2.6554510889747276e-12], [1.0613542555275592e-5, 1.8368192973638833e-5, 2.4085034604192833e-5, 2.1159515250466423e-5, 1.2812295490653183e-5, 5.4795897272217685e-6, 1.6804330140718864e-6, 3.7395782230753960e-7, 6.1320692462892089e-8, 7.6150155566936873e-9, 7.5582551102019842e-10, 6.6560783982856266e-11, 6.2214064893680724e-12, 7.1325330790189130e-13], [-9.7386073950742691e-8, -2.6896573552682773e-7, -4.7070691476797551e-7, -5.2526269720787171e-7, -3.9759866508659401e-7, -2.1060575644779030e-7, -7.9536843122841196e-8, -2.1747547389680583e-8, -4.3848790691728244e-9, -6.7133937936796899e-10, -8.2337185904075816e-11, -8.9293079860313063e-12, -1.0069753225296216e-12, -1.3166699799503824e-13], [9.1627036645563814e-10, 3.7754294124827708e-9, 8.5211525616953560e-9, 1.1882429764305251e-8, 1.1042332310026922e-8, 7.1013652873282702e-9, 3.2372064928200287e-9, 1.0664750212508115e-9, 2.5936075981617414e-10, 4.8030993398748848e-11, 7.1431677013226845e-12, 9.3691587647441524e-13, 1.2548453798087344e-13, 1.8514356537940565e-14], [-8.8404369658987226e-12, -5.1032415331622557e-11, -1.4591839427335428e-10, -2.5043039190097354e-10, -2.8134128471465090e-10, -2.1647331640216672e-10, -1.1743825811251093e-10, -4.5961587694721180e-11, -1.3289737228509467e-11, -2.9332816818532057e-12, -5.2101005431460415e-13, -8.1398108631022543e-14, -1.2765604860523986e-14, -2.1036562967082615e-15], [8.3446062726290781e-14, 6.6835062275878926e-13, 2.3922532320596682e-12, 4.9857652538601042e-12, 6.6881933809870741e-12, 6.0862733154278944e-12, 3.8853816955933076e-12, 1.7860878021096082e-12, 6.0693834120213096e-13, 1.5774020196199675e-13, 3.3039893398207290e-14, 6.0682382646421554e-15, 1.1004420335487301e-15, 2.0065602534909181e-16], [-8.4292017251199703e-16, -8.5457289063958790e-15, -3.7752419050621036e-14, -9.4557268157096875e-14, -1.5000911086785450e-13, -1.5994354715513437e-13, -1.1903887922788786e-13, -6.3672156494388343e-14, -2.5181236647261598e-14, -7.6273464635769286e-15, -1.8634874042933304e-15, -3.9775905852388014e-16, -8.2479342624849690e-17, -1.6501201619090548e-17], [7.0621925630619803e-18, 1.0660992416313391e-16, 5.7777564050021177e-16, 1.7216514832381439e-15, 3.2016384306449454e-15, 3.9670416174320258e-15, 3.4146789819984975e-15, 2.1080539966330149e-15, 9.6213577481731627e-16, 3.3662727419163198e-16, 9.5014916413634044e-17, 2.3331079197455333e-17, 5.4769167019981574e-18, 1.1931452160472032e-18], [-8.7459572611194968e-20, -1.3108839793476129e-18, -8.5767331753501051e-18, -3.0208317328055258e-17, -6.5404239428949640e-17, -9.3529109013838762e-17, -9.2464161023735729e-17, -6.5417069637449762e-17, -3.4201699155038508e-17, -1.3713111514980166e-17, -4.4335579101316771e-18, -1.2410288905746482e-18, -3.2685135068950853e-19, -7.7005980819278586e-20], [6.4973972683482026e-22, 1.5780209478439817e-20, 1.2442439415994877e-19, 5.1349906789278764e-19, 1.2853833217563940e-18, 2.1079376836938981e-18, 2.3785964742636813e-18, 1.9163074453061330e-18, 1.1400743168106876e-18, 5.2011793992875870e-19, 1.9113415546210911e-19, 6.0487892638073199e-20, 1.7728295956174649e-20, 4.4893033195694961e-21], [1.8334096045833511e-24, -1.8533441112062049e-22, -1.7656541746461841e-21, -8.4797345723884491e-21, -2.4393625774660406e-20, -4.5616530357946680e-20, -5.8422642292059953e-20, -5.3291181402090584e-20, -3.5860089946626183e-20, -1.8494579018429559e-20, -7.6708585786546403e-21, -2.7239908786257317e-21, -8.8189820201752383e-22, -2.3869597872849434e-22], [4.6351489003802850e-25, 2.2635511423803257e-24, 2.4265225577394201e-23, 1.3605222349576026e-22, 4.4824272223793763e-22, 9.5121833088971870e-22, 1.3757148158694679e-21, 1.4133517997642715e-21, 1.0697673011471116e-21, 6.2001296117416023e-22, 2.8837286619772303e-22, 1.1411648445325265e-22, 4.0535802473621050e-23, 1.1667634258992255e-23], [9.3694418393287467e-27, -2.3748643464876681e-26, -3.3732133928489370e-25, -2.1408284563506470e-24, -8.0018340237434086e-24, -1.9165680145110941e-23, -3.1148514099279029e-23, -3.5862936611147122e-23, -3.0372827868923290e-23, -1.9670324774557274e-23, -1.0196187685525770e-23, -4.4668806399127128e-24, -1.7297659393126719e-24, -5.2696571050321209e-25]],
        [[7.2713945137973604e-2, 5.3993262660074707e-2, 2.9718252332510283e-2, 1.2082846907995308e-2, 3.6107403524495263e-3, 7.8809419197805230e-4, 1.2478221302980958e-4, 1.4249549964657772e-5, 1.1720259460407758e-6, 7.0176642214686266e-8, 3.1820414359694454e-9, 1.2128408159730386e-10, 4.9018852855348578e-12, 2.9207151663968383e-13], [-1.1383641453423172e-3, -1.1217961404640241e-3, -9.2931199220774526e-4, -5.7598571157179347e-4, -2.5581092527509659e-4, -8.0483635826563069e-5, -1.7898095589584695e-5, -2.8152327235917000e-6, -3.1466382136835182e-7, -2.5373272083951231e-8, -1.5376689756549583e-9, -7.7325816761627616e-11, -3.9899160371117767e-12, -2.8119987368925563e-13], [9.5273685131719680e-6, 1.5471980356335536e-5, 1.9167482133084827e-5, 1.5850636431497310e-5, 8.9402859763591223e-6, 3.5132718398815842e-6, 9.7302905101096651e-7, 1.9120072761223331e-7, 2.6862383161929302e-8, 2.7441644167462133e-9, 2.1234691068972392e-10, 1.3677010275031017e-11, 8.9037389989161222e-13, 7.4453836732577030e-14], [-8.4039004910070242e-8, -2.1592746047640559e-7, -3.5492107792852641e-7, -3.6951103481712077e-7, -2.5845909955960464e-7, -1.2498253860284773e-7, -4.2410033081981454e-8, -1.0201207906428201e-8, -1.7591415843168941e-9, -2.2187892857115911e-10, -2.1358940597604460e-11, -1.7194450237275080e-12, -1.3840554842671562e-13, -1.3561953864237451e-14], [7.5769726177608905e-10, 2.8976255156035276e-9, 6.1010037404829094e-9, 7.8843234054329419e-9, 6.7321952389317094e-9, 3.9326304291370874e-9, 1.6037587894438532e-9, 4.6327273095755048e-10, 9.6213625900703566e-11, 1.4698579373244546e-11, 1.7260729581245784e-12, 1.7027254467094501e-13, 1.6634880626831494e-14, 1.8839715958932278e-15], [-7.0981334260593365e-12, -3.7517475606891149e-11, -9.9354264966861792e-11, -1.5719705520020326e-10, -1.6151718214798565e-10, -1.1241252812370239e-10, -5.4363897697304603e-11, -1.8608595446318893e-11, -4.5905765043683128e-12, -8.3718041809490959e-13, -1.1808930112243805e-13, -1.4043507510366460e-14, -1.6382695413023235e-15, -2.1171490386223824e-16], [6.2573759221539486e-14, 4.7052181357494931e-13, 1.5536707186821933e-12, 2.9705130888807361e-12, 3.6285246484217336e-12, 2.9755999526884845e-12, 1.6882947598584232e-12, 6.7743434008560064e-13, 1.9629986600925641e-13, 4.2231304171702530e-14, 7.0642410898559742e-15, 9.9880039687023330e-16, 1.3716023177524675e-16, 1.9993128194162156e-17], [-6.6166411388040370e-16, -5.7816565998407665e-15, -2.3376985890247363e-14, -5.3529330208491150e-14, -7.7079650427038353e-14, -7.3844008816975631e-14, -4.8729812853387276e-14, -2.2717406820769027e-14, -7.6604790211839648e-15, -1.9247916312732939e-15, -3.7765221422468528e-16, -6.2721514136708225e-17, -1.0012432237871014e-17, -1.6292459050288051e-18], [4.4744661008296503e-18, 6.9076878863147461e-17, 3.4258873366522394e-16, 9.2891151108221217e-16, 1.5622175350863076e-15, 1.7343963729949868e-15, 1.3210069799533049e-15, 7.1000792923157226e-16, 2.7637581183407196e-16, 8.0401394841078241e-17, 1.8326569124714108e-17, 3.5374690004468519e-18, 6.4911878792783458e-19, 1.1682928543246182e-19], [-5.1395552795957472e-20, -8.1463522730661115e-19, -4.8650688733015276e-18, -1.5545490703708857e-17, -3.0356666212514627e-17, -3.8809220491419675e-17, -3.3894984452261464e-17, -2.0862394317364214e-17, -9.3079739967173827e-18, -3.1110682224946032e-18, -8.1681823441972931e-19, -1.8150397753866417e-19, -3.7901973801884158e-20, -7.4829846562557105e-21], [1.4114129066507667e-21, 9.6464588098857571e-21, 6.7147650648651532e-20, 2.5190088101968619e-19, 5.6820769937996385e-19, 8.3174907958098656e-19, 8.2814455302991521e-19, 5.8022010702314560e-19, 2.9483076737195827e-19, 1.1243717608198929e-19, 3.3742374441062841e-20, 8.5574473484556307e-21, 2.0152188717442099e-21, 4.3320266319870235e-22], [3.7223610122371411e-23, -1.0055384006550099e-22, -9.3644556721183144e-22, -4.0020619988979481e-21, -1.0301854690777169e-20, -1.7151852621612816e-20, -1.9360917824607299e-20, -1.5356144626759781e-20, -8.8356207282552752e-21, -3.8204842222803687e-21, -1.3013087226637299e-21, -3.7371897524145264e-22, -9.8433888506519715e-23, -2.2885411332136418e-23], [1.0034929970221869e-24, 1.3637307526471519e-24, 1.1764060629302931e-23, 6.0870032448807681e-23, 1.8060686220461542e-22, 3.4123602099272077e-22, 4.3474849428551550e-22, 3.8843403444951279e-22, 2.5173585875803041e-22, 1.2270264775651231e-22, 4.7130653070776449e-23, 1.5217098526005850e-23, 4.4492202223259589e-24, 1.1120173225233392e-24], [7.9378001643713997e-27, -1.2745808774080314e-26, -1.6386432842639417e-25, -9.2460737488624816e-25, -3.0878802164545053e-24, -6.5720205493413509e-24, -9.4038506129979367e-24, -9.4197212486782255e-24, -6.8414653159906634e-24, -3.7384020262954999e-24, -1.6093089478856923e-24, -5.8015235914309493e-25, -1.8695995682072770e-25, -4.9948720005029426e-26]],
        [[7.0510380994247511e-2, 5.1865762084396868e-2, 2.8000560710688386e-2, 1.1045009877571421e-2, 3.1619674478205271e-3, 6.5114017897456718e-4, 9.5419908556218321e-5, 9.8344031897510972e-6, 7.0548657925262004e-7, 3.5115572706418899e-8, 1.2360400383219110e-9, 3.3284712550848772e-11, 8.5820155827461464e-13, 3.2761941213374915e-14], [-1.0659832650083151e-3, -1.0076499580208283e-3, -7.9148775070614627e-4, -4.6498869282579056e-4, -1.9508155337114673e-4, -5.7455688403701626e-5, -1.1783650496388336e-5, -1.6727333476300334e-6, -1.6364879509172464e-7, -1.1060414192996553e-8, -5.2826479770544663e-10, -1.9254810096981623e-11, -6.5858684080547467e-13, -3.0977810172644663e-14], [8.5872023857292664e-6, 1.3136108548310824e-5, 1.5434555833494231e-5, 1.2080936328915384e-5, 6.3920073184031361e-6, 2.3277093299434063e-6, 5.8823247241370281e-7, 1.0334384201215557e-7, 1.2625317350834099e-8, 1.0786704390812034e-9, 6.6080479121459940e-11, 3.1309562137899641e-12, 1.3907662563196554e-13, 8.0513320830590410e-15], [-7.2975979172797977e-8, -1.7500555784340159e-7, -2.7137788056362504e-7, -2.6509500963575968e-7, -1.7249884460883300e-7, -7.6770972812771706e-8, -2.3637030396744775e-8, -5.0604638884541258e-9, -7.5648173694205245e-10, -7.9748758831362957e-11, -6.1017526946707057e-12, -3.6575012634762639e-13, -2.0584342934482978e-14, -1.4418412135692943e-15], [6.2932972692870092e-10, 2.2482734242952009e-9, 4.4395575325013167e-9, 5.3472943350966409e-9, 4.2232983869827285e-9, 2.2587119964138198e-9, 8.3177171741133014e-10, 2.1297882199485439e-10, 3.8236556273358902e-11, 4.8798961608005932e-12, 4.5711230404784548e-13, 3.3939318664994395e-14, 2.3686866967952912e-15, 1.9725163515317721e-16], [-5.8037271359485660e-12, -2.7942436567416930e-11, -6.8827160870907333e-11, -1.0098690093833372e-10, -9.5554767245085124e-11, -6.0631383362761640e-11, -2.6375562869570318e-11, -7.9772051306793684e-12, -1.6977072772516965e-12, -2.5864910347438391e-13, -2.9209227519810526e-14, -2.6408029899867461e-15, -2.2440251928517699e-16, -2.1863763944669334e-17], [4.5874153967147206e-14, 3.3565915193032642e-13, 1.0295381731270664e-12, 1.8158075670158090e-12, 2.0326777105912507e-12, 1.5134018705724435e-12, 7.6970364037740949e-13, 2.7215716534665975e-13, 6.7931097243120094e-14, 1.2214052453151662e-14, 1.6419335312488082e-15, 1.7818603203174099e-16, 1.8145551964226980e-17, 2.0392844931834609e-18], [-5.3309970835932459e-16, -3.9735487899094340e-15, -1.4769806228589424e-14, -3.1112879775946032e-14, -4.0941986717869907e-14, -3.5506969186549770e-14, -2.0947057563293053e-14, -8.5873672762068991e-15, -2.4917923952340532e-15, -5.2368301484158297e-16, -8.2901511601301183e-17, -1.0666048879629296e-17, -1.2837409843264145e-18, -1.6433420372572028e-19], [4.1701225917721659e-18, 4.5788104065855445e-17, 2.0717872205568126e-16, 5.1493317045795392e-16, 7.8885535071157490e-16, 7.9055949278311220e-16, 5.3702256855770032e-16, 2.5339258367921033e-16, 8.4824509441258720e-17, 2.0664095563937624e-17, 3.8160458696105172e-18, 5.7576138332183209e-19, 8.0900589651795467e-20, 1.1665183785276071e-20], [5.2627869715375313e-20, -5.0022969700138081e-19, -2.8631947152685441e-18, -8.2774371843797149e-18, -1.4621917179287596e-17, -1.6812338469311998e-17, -1.3065721135507368e-17, -7.0503268998226843e-18, -2.7044512749813707e-18, -7.5805619505655613e-19, -1.6194172582836201e-19, -2.8375527612583259e-20, -4.6036990625532309e-21, -7.4030480931839313e-22], [4.1445133337753999e-21, 6.4424628339687703e-21, 3.5868532246238629e-20, 1.2614082329563916e-19, 2.6004084360311492e-19, 3.4267894027532938e-19, 3.0330721646370233e-19, 1.8614742872797172e-19, 8.1332243408659539e-20, 2.6057180102481861e-20, 6.3908367991438049e-21, 1.2890596485422279e-21, 2.3909760246094251e-22, 4.2498289407696446e-23], [8.4347848730697491e-23, -4.9952913672426200e-23, -5.3120857118349918e-22, -1.9710040733918786e-21, -4.5285042907767707e-21, -6.7445192432617021e-21, -6.7529665341077100e-21, -4.6880473247590190e-21, -2.3202143288212967e-21, -8.4450516859105509e-22, -2.3615916448772405e-22, -5.4394911697852427e-23, -1.1430901581132703e-23, -2.2278762150652394e-24], [6.2313711894659668e-25, 7.4173427022229729e-25, 5.9681159653552692e-24, 2.8256925190681381e-23, 7.5710659127465995e-23, 1.2807901838058083e-22, 1.4464165448691993e-22, 1.1307600424434958e-22, 6.3075538766143626e-23, 2.5937355713631517e-23, 8.2174454589878432e-24, 2.1454456140854906e-24, 5.0661712571286477e-25, 1.0748996873792674e-25], [-3.1450334742955057e-26, -1.3066466645250776e-26, -6.4705822712687730e-26, -3.9669347972385633e-25, -1.2327024512517912e-24, -2.3571995794713238e-24, -2.9893079602941699e-24, -2.6198957743761865e-24, -1.6392634432761437e-24, -7.5752093581306231e-25, -2.7025280357493651e-25, -7.9416262594717954e-26, -2.0908274808802730e-26, -4.7968337422480134e-27]],
        [[6.8444454242227946e-2, 4.9949306179097525e-2, 2.6531537825001309e-2, 1.0202540730826073e-2, 2.8171103501026275e-3, 5.5231326352257715e-4, 7.5797110023787148e-5, 7.1575276881433854e-6, 4.5638755110529644e-7, 1.9324211850454916e-8, 5.4164340398882831e-10, 1.0508930282392049e-11, 1.7084536281681553e-13, 3.8888375889499441e-15], [-1.0006257722345999e-3, -9.1038963123538845e-4, -6.7992642499641243e-4, -3.7975076091898039e-4, -1.5120647093254040e-4, -4.1985480602608311e-5, -8.0205614475730853e-6, -1.0411222796202053e-6, -9.0660820523441670e-8, -5.2415592858988602e-9, -2.0176393127974238e-10, -5.4214621406155185e-12, -1.2165589163900719e-13, -3.5884357934999428e-15], [7.7682564624066587e-6, 1.1234755298572978e-5, 1.2562787404877600e-5, 9.3534193565818733e-6, 4.6720239668215443e-6, 1.5888561544964140e-6, 3.6981009602599496e-7, 5.8759519420346170e-8, 6.3310342275768781e-9, 4.6006809353336952e-10, 2.2718979155391295e-11, 8.0183848351743125e-13, 2.4014501781770560e-14, 9.1020750507236555e-16], [-6.3780248690102217e-8, -1.4310131918034577e-7, -2.1014304925278041e-7, -1.9359430143435656e-7, -1.1790826299062211e-7, -4.8652057298404763e-8, -1.3714403695291009e-8, -2.6420975574379214e-9, -3.4691661194842891e-10, -3.1032593845834683e-11, -1.9162651136111696e-12, -8.6311264362075054e-14, -3.3505464433397869e-15, -1.5945900277508091e-16], [5.2314603279756201e-10, 1.7617621210895722e-9, 3.2801058182147935e-9, 3.7013552264372874e-9, 2.7201008412096816e-9, 1.3414751437371122e-9, 4.4993729942676155e-10, 1.0317589168082476e-10, 1.6206217777823598e-11, 1.7511250573468594e-12, 1.3253650870034492e-13, 7.4525407593745579e-15, 3.6604545403691131e-16, 2.1393041211316028e-17], [-4.8637102176940067e-12, -2.1071117399220593e-11, -4.8418127465112918e-11, -6.6243771664582150e-11, -5.8097709100792540e-11, -3.3858684349158741e-11, -1.3362337667163409e-11, -3.6061395794694163e-12, -6.6950381215489078e-13, -8.6236554044081286e-14, -7.8812346566320158e-15, -5.4372676879732037e-16, -3.3117885565882009e-17, -2.3304547255443290e-18], [3.3371801278009735e-14, 2.4253793252034551e-13, 6.9503653059689542e-13, 1.1366057295276190e-12, 1.1729096250763774e-12, 7.9835269028903141e-13, 3.6690476269323639e-13, 1.1537993356835630e-13, 2.5062940792946539e-14, 3.8064732921173581e-15, 4.1491314210549710e-16, 3.4615796380037240e-17, 2.5701209075225287e-18, 2.1402900127306477e-19], [-3.2988317789943298e-16, -2.7505049805280215e-15, -9.5534477603519415e-15, -1.8577392248113869e-14, -2.2447259814869904e-14, -1.7735166149978018e-14, -9.4249199549893990e-15, -3.4272925173616802e-15, -8.6389460262463953e-16, -1.5330191419213591e-16, -1.9723429981498505e-17, -1.9653217314065667e-18, -1.7523652404045623e-19, -1.7009942205190238e-20], [9.9628444499043350e-18, 3.1964613126532788e-17, 1.2499543609328065e-16, 2.9003552063417250e-16, 4.0996380776732502e-16, 3.7426457742382810e-16, 2.2862486629644308e-16, 9.5508138180436144e-17, 2.7737355826119731e-17, 5.7058253131982985e-18, 8.5862287392452437e-19, 1.0107589472510128e-19, 1.0681216288584915e-20, 1.1924784998194213e-21], [2.9273044279115714e-19, -2.7871151618065610e-19, -1.8204069997838022e-18, -4.6286379511136035e-18, -7.3278056060807129e-18, -7.5923166199513093e-18, -5.2817719265232493e-18, -2.5173730250537343e-18, -8.3683426213674841e-19, -1.9815134035757845e-19, -3.4594824870075300e-20, -4.7644820593348984e-21, -5.8972376149333346e-22, -7.4830111549680906e-23], [7.5764498995673931e-21, 4.7525159376845135e-21, 1.7999356607496027e-20, 6.3413551009829877e-20, 1.2246057112986291e-19, 1.4689047901201933e-19, 1.1649866796307247e-19, 6.3101495531656306e-20, 2.3881038506297209e-20, 6.4683910092892740e-21, 1.3006724735264423e-21, 2.0773082734042565e-22, 2.9796901008209101e-23, 4.2520541556259001e-24], [4.1680913656154862e-23, -3.3999201013014907e-23, -2.9058982299175589e-22, -9.8372497392909318e-22, -2.0556370055927987e-21, -2.7633847798123954e-21, -2.4718153990311456e-21, -1.5123861611003702e-21, -6.4813099051992312e-22, -1.9965539489825845e-22, -4.5931162737245157e-23, -8.4385357931503930e-24, -1.3892212563393277e-24, -2.2083980036512029e-25], [-3.1696630359158823e-24, -1.5979811671682871e-25, 4.7549676027677203e-24, 1.5105870716196986e-23, 3.3614106738021943e-23, 5.0336929332444820e-23, 5.0556228711152564e-23, 3.4787062643025529e-23, 1.6801165178435289e-23, 5.8550588838459198e-24, 1.5315646947100755e-24, 3.2128839723454525e-25, 6.0171183994604069e-26, 1.0564824692459540e-26], [-1.1920388391942872e-25, -2.2451756136693338e-26, 1.5818436086718034e-26, -1.3673984276013591e-25, -4.9381331617646298e-25, -8.7855072031264510e-25, -9.9752751169686859e-25, -7.6988763587843987e-25, -4.1724838395317317e-25, -1.6367051588152054e-25, -4.8393515245306118e-26, -1.1509504660712898e-26, -2.4315829698270109e-27, -4.6781560242456093e-28]],
        [[6.6503020841030821e-2, 4.8213285473688700e-2, 2.5264786555324385e-2, 9.5111598358379655e-3, 2.5480628019286917e-3, 4.7943181209379308e-4, 6.2268037559628038e-5, 5.4616860127464831e-6, 3.1508468304879507e-7, 1.1608852541461531e-8, 2.6635523482834560e-10, 3.8276191910699496e-12, 3.9372419080908664e-14, 4.9694937519196032e-16], [-9.4140599932700777e-4, -8.2693134811646525e-4, -5.8868693160852821e-4, -3.1330103289837410e-4, -1.1882934256443792e-4, -3.1290499916230423e-5, -5.6155834537536479e-6, -6.7444681496869884e-7, -5.3096334517309271e-8, -2.6790897972758415e-9, -8.5154777263575947e-11, -1.7276372260435999e-12, -2.5504493134509508e-14, -4.4336153054926194e-16], [7.0500397045483788e-6, 9.6737194002858374e-6, 1.0326710311194747e-5, 7.3462561759492333e-6, 3.4843384765293329e-6, 1.1144295413872330e-6, 2.4094819480640299e-7, 3.4990315723891782e-8, 3.3690320073220968e-9, 2.1169898533108507e-10, 8.5934245822491721e-12, 2.3009814191304735e-13, 4.6405246712841785e-15, 1.0886133042893288e-16], [-5.6146935788299575e-8, -1.1799244633858457e-7, -1.6458547715793722e-7, -1.4364929071220811e-7, -8.2342657457080365e-8, -3.1712161442550883e-8, -8.2517603494969162e-9, -1.4451484083629041e-9, -1.6877666921840694e-10, -1.3006774168917319e-11, -6.5939573797331994e-13, -2.2644132148037462e-14, -6.0356259542904375e-16, -1.8530972222913871e-17], [4.3336811182195925e-10, 1.3928732741051689e-9, 2.4589800911271862e-9, 2.6119561083847023e-9, 1.7954720056271106e-9, 8.2173603961197703e-10, 2.5300113010303105e-10, 5.2455127411259887e-11, 7.2923788567271998e-12, 6.7627545261373970e-13, 4.1970706325666596e-14, 1.8075213759850110e-15, 6.2022723188988995e-17, 2.4242894921038107e-18], [-4.1257484930676363e-12, -1.6066829526432825e-11, -3.4551354112997894e-11, -4.4296807123498415e-11, -3.6221584789748173e-11, -1.9521092035240046e-11, -7.0448023579769480e-12, -1.7123090464410608e-12, -2.8036692435489775e-13, -3.0913610253926131e-14, -2.3157544752973981e-15, -1.2294801984733919e-16, -5.3164051179511471e-18, -2.5831190923207083e-19], [3.0603030813080322e-14, 1.7857874555936510e-13, 4.7455230416053511e-13, 7.2438344785173096e-13, 6.9423300752084935e-13, 4.3524019791367272e-13, 1.8220764467037852e-13, 5.1421550082244700e-14, 9.8209188279191987e-15, 1.2742280128669147e-15, 1.1386702851603053e-16, 7.3474278538435213e-18, 3.9321005097872422e-19, 2.3264394754407897e-20], [2.1593585911490106e-16, -1.8547281500834105e-15, -6.4839872207286008e-15, -1.1545535177533971e-14, -1.2755609006488015e-14, -9.1989512821618440e-15, -4.4283465676710997e-15, -1.4395839563435533e-15, -3.1815849953813629e-16, -4.8157855758233471e-17, -5.0829294892244672e-18, -3.9379830657983416e-19, -2.5678677773516507e-20, -1.8171384533365704e-21], [2.5807889842666444e-17, 2.4938887450096771e-17, 6.9987343328249836e-17, 1.6042625915121650e-16, 2.1628181742869996e-16, 1.8284975195611033e-16, 1.0150633752642896e-16, 3.7884781028737562e-17, 9.6329487926948552e-18, 1.6888763067772861e-18, 2.0874290432567607e-19, 1.9211472973393362e-20, 1.5055256137636448e-21, 1.2543261898959096e-22], [5.6244473946870522e-19, -1.2529768306191489e-19, -1.2836407889794315e-18, -2.7635855246020816e-18, -3.8399836075442332e-18, -3.5727993145645654e-18, -2.2338857313616307e-18, -9.4692206708834327e-19, -2.7500215392814293e-19, -5.5463279004448115e-20, -7.9657179936079452e-21, -8.6261572117156439e-22, -8.0246480381832583e-23, -7.7625329004131371e-24], [3.5015616689878205e-21, 2.6345789622596751e-21, 1.0811303779631819e-20, 3.4302953840308137e-20, 6.0235891191074039e-20, 6.5592523200848466e-20, 4.6831130817660027e-20, 2.2540399626772722e-20, 7.4450517682476644e-21, 1.7174547115812010e-21, 2.8464556659544325e-22, 3.5957340890609875e-23, 3.9268603074588798e-24, 4.3560171097076896e-25], [-2.9088308228683423e-22, -7.3124250357672495e-23, -1.8059883966353350e-23, -3.6599823117976550e-22, -9.0323633836429481e-22, -1.1619372836318219e-21, -9.4468381166526953e-22, -5.1400843180562998e-22, -1.9215560725444118e-22, -5.0427548680597849e-23, -9.5834696567960110e-24, -1.4010639193996194e-24, -1.7781257174000655e-25, -2.2369128352461769e-26], [-1.1092487464862566e-23, -1.5078849969261465e-24, 6.9594458682499002e-24, 1.1654717879999015e-23, 1.6972989387922920e-23, 2.0981645426820445e-23, 1.8565393764716585e-23, 1.1286326656579793e-23, 4.7484061141030216e-24, 1.4103392285613088e-24, 3.0552954671998432e-25, 5.1317240422288937e-26, 7.4985320279009001e-27, 1.0591704556044672e-27], [-1.6189068296234247e-25, -2.6188984675177881e-26, 5.5540428198575526e-26, -1.9090416297846137e-26, -1.9280253033412221e-25, -3.3782414775834442e-25, -3.4825963891087864e-25, -2.3845542885126532e-25, -1.1262459424375384e-25, -3.7686760647671599e-26, -9.2543971614242474e-27, -1.7733006617614341e-27, -2.9570586237037995e-28, -4.6463991077219996e-29]],
        [[6.4674554823200322e-2, 4.6632581055678807e-2, 2.4164211985510959e-2, 8.9383298121951040e-3, 2.3354616080570447e-3, 4.2470148296526132e-4, 5.2693265529933196e-5, 4.3463930572838079e-6, 2.3059451033481279e-7, 7.5545131080484269e-9, 1.4596223564001882e-10, 1.6067773366183653e-12, 1.0674094335713008e-14, 6.9976411662037148e-17], [-8.8758885248071448e-4, -7.5484935870950584e-4, -5.1335329686532073e-4, -2.6077739867404744e-4, -9.4468440148353176e-5, -2.3700111096227018e-5, -4.0246159599144269e-6, -4.5184995090007147e-7, -3.2617631766170370e-8, -1.4639693447745222e-9, -3.9392500696267477e-11, -6.2132698815844623e-13, -6.1395263006736232e-15, -5.9526327770729408e-17], [6.4152962761905333e-6, 8.3816316433848482e-6, 8.5667884548668973e-6, 5.8467587871045453e-6, 2.6473168998837297e-6, 8.0151115384938981e-7, 1.6223411336961675e-7, 2.1739022665983214e-8, 1.8932340747762374e-9, 1.0448774751684082e-10, 3.5568064023870316e-12, 7.3903456474343523e-14, 1.0141884207191769e-15, 1.3987566588652606e-17], [-4.9829281806592248e-8, -9.8060382224988467e-8, -1.3020888770005225e-7, -1.0810145222215770e-7, -5.8614128269721357e-8, -2.1197246768852392e-8, -5.1297050974744194e-9, -8.2437227534309860e-10, -8.6652816351230922e-11, -5.8392417932229240e-12, -2.4746924266142144e-13, -6.6028740856718094e-15, -1.2151679037048035e-16, -2.2923029654556014e-18], [3.5925027581964110e-10, 1.1106395009317276e-9, 1.8682776840836800e-9, 1.8763271625441649e-9, 1.2122814164319184e-9, 5.1788021958093763e-10, 1.4741439317174172e-10, 2.7879049008360230e-11, 3.4680312852738576e-12, 2.7976347895942624e-13, 1.4464123577943748e-14, 4.8449726903266062e-16, 1.1630980428677047e-17, 2.9022293104695395e-19], [-3.2065339692419839e-12, -1.2317572060032999e-11, -2.5127283452570135e-11, -3.0293862684804492e-11, -2.3176588820286213e-11, -1.1607913638507655e-11, -3.8558359208114424e-12, -8.5111991718816160e-13, -1.2417222046024518e-13, -1.1866066501316028e-14, -7.3890419365389212e-16, -3.0570393899605059e-17, -9.3662443178566855e-19, -3.0056948044685377e-20], [5.1251888986394302e-14, 1.3724237159604100e-13, 3.1802456952697266e-13, 4.5977638816774672e-13, 4.1611826127950555e-13, 2.4335868488712826e-13, 9.3772859933489717e-14, 2.3985414183618723e-14, 4.0703245104232778e-15, 4.5648152383487944e-16, 3.3863425387644984e-17, 1.7070197614078097e-18, 6.5535514536348269e-20, 2.6405774474876591e-21], [1.3572601178815441e-15, -1.1162650254847765e-15, -4.8955940642271099e-15, -7.7606723594039099e-15, -7.6460804288760228e-15, -4.9838234563313195e-15, -2.1732155775948164e-15, -6.3492118080035787e-16, -1.2406735040976523e-16, -1.6183991513543783e-17, -1.4166962775608573e-18, -8.6001224415538940e-20, -4.0723221411685388e-21, -2.0178780456577784e-22], [4.3869716225096195e-17, 2.1323951783295664e-17, 3.2330954360421654e-17, 8.3230298074255090e-17, 1.1378811621189494e-16, 9.1436531752524476e-17, 4.6772771703312237e-17, 1.5754901596205317e-17, 3.5409794463361951e-18, 5.3438160765553904e-19, 5.4774475162925760e-20, 3.9639006843430381e-21, 2.2829942660918869e-22, 1.3661647037257458e-23], [2.6417655906028612e-19, -1.0972919868305938e-19, -7.6007941102751057e-19, -1.5521603092601000e-18, -2.0161375007470169e-18, -1.7277289868747251e-18, -9.8285768571037573e-19, -3.7386010736737393e-19, -9.5680455528754654e-20, -1.6584417002349963e-20, -1.9757769923086618e-21, -1.6889645121450126e-22, -1.1684835837279798e-23, -8.3100118730864303e-25], [-2.3382723208603789e-20, -2.5617724573550582e-21, 1.8155713021592219e-20, 3.0154672996159726e-20, 3.5485781572766830e-20, 3.1620221615736892e-20, 1.9829577031624284e-20, 8.4763093403174090e-21, 2.4584927651827476e-21, 4.8679924512417542e-22, 6.6970660225694002e-23, 6.7066937703754572e-24, 5.5108370210908416e-25, 4.5917573867293450e-26], [-9.6191717028822966e-22, -1.6833761636696408e-22, 3.6003707149552348e-22, 1.6461274944790597e-22, -2.7846741594663036e-22, -4.7335340336494469e-22, -3.7175916085696112e-22, -1.8315073238282524e-22, -6.0294432584798173e-23, -1.3583970767763781e-23, -2.1454762259398071e-24, -2.4979723657801075e-25, -2.4127490441724905e-26, -2.3254401662780657e-27], [-1.4493322498311374e-23, -2.1001838526714283e-24, 7.7562354876480715e-24, 9.8073507410741594e-24, 9.6696019487379463e-24, 9.3469191019984481e-24, 7.1684315060940629e-24, 3.8548283103493133e-24, 1.4209514863889857e-24, 3.6201729323467896e-25, 6.5269024935938039e-26, 8.7728526520023005e-27, 9.8660875805923015e-28, 1.0873603926944411e-28], [1.2278581955399976e-25, 1.6995712380147241e-26, -6.9135544344739411e-26, -9.7833314478847825e-26, -1.2241352915181737e-25, -1.4543167476234833e-25, -1.2847133339251079e-25, -7.7775273196042605e-26, -3.2177573618770579e-26, -9.2383984706949541e-27, -1.8914489495221966e-27, -2.9150726225616390e-28, -3.7825181454181906e-29, -4.7162639500108329e-30]],
        [[6.2948872058418446e-2, 4.5186410700860489e-2, 2.3201426853903937e-2, 8.4597733719660374e-3, 2.1656874775749809e-3, 3.8299682447632217e-4, 4.5771862080672091e-5, 3.5898910266646224e-6, 1.7777238243600249e-7, 5.2844511374774364e-9, 8.8411632264774388e-11, 7.7396798252968245e-13, 3.4458201504423600e-15, 1.1198243861788361e-17], [-8.3856493555942041e-4, -6.9221871727414601e-4, -4.5059656727099875e-4, -2.1872433538762050e-4, -7.5805679641528800e-5, -1.8180422295293750e-5, -2.9380302720017823e-6, -3.1104137210522656e-7, -2.0847099846589685e-8, -8.4706919689886717e-10, -1.9773514999077163e-11, -2.5048060819476702e-13, -1.7094360326511043e-15, -8.8932483639036889e-18], [5.8499753564379751e-6, 7.3039527444404847e-6, 7.1682729134221501e-6, 4.7114268068731393e-6, 2.0466047542432004e-6, 5.9011065137584020e-7, 1.1263065810677342e-7, 1.4048164648546285e-8, 1.1188207697581762e-9, 5.5020292507190929e-11, 1.6012918750550832e-12, 2.6471446308193334e-14, 2.5256406335156095e-16, 1.9684649668689258e-18], [-4.4511683705372751e-8, -8.2091294008157739e-8, -1.0396687657836079e-7, -8.2396730002714120e-8, -4.2449416187805311e-8, -1.4493244655668628e-8, -3.2837454790164632e-9, -4.8836822899903763e-10, -4.6709913748809960e-11, -2.7915944937419100e-12, -1.0072425806814198e-13, -2.1343221767690293e-15, -2.7548066674189964e-17, -3.0674141957201223e-19], [3.1132473574756152e-10, 8.9507373524437785e-10, 1.4314726587859928e-9, 1.3645631974355117e-9, 8.3315275482450085e-10, 3.3431852594001263e-10, 8.8627333699201098e-11, 1.5422221737393206e-11, 1.7348615941052452e-12, 1.2334813733979578e-13, 5.4000116027074634e-15, 1.4331414522531059e-16, 2.4321933170913664e-18, 3.7210270363229254e-20], [-1.3617355318791589e-12, -9.3264580543373970e-12, -1.9042100546239782e-11, -2.1608673377845542e-11, -1.5405102964319489e-11, -7.1608568595668028e-12, -2.1942710189800530e-12, -4.4226798248838885e-13, -5.7980412062582928e-14, -4.8574758048565436e-15, -2.5509295628061955e-16, -8.3536178388366534e-18, -1.8246344841551282e-19, -3.7149552877146237e-21], [1.0851899788425053e-13, 1.1471362536484146e-13, 1.9252593078423244e-13, 2.7314250985172395e-13, 2.4394398405326894e-13, 1.3696358953496221e-13, 4.9489976672746847e-14, 1.1631535600554661e-14, 1.7752400686775486e-15, 1.7425050433836116e-16, 1.0878882683364015e-17, 4.3415849125264148e-19, 1.1988300686573258e-20, 3.1617213309246489e-22], [2.6394717933340093e-15, -5.3288592508085220e-16, -4.1220138146829528e-15, -5.7371721143962018e-15, -4.9090020436439772e-15, -2.8427699609435584e-15, -1.1163164494679421e-15, -2.9368010525876252e-16, -5.1081880330390536e-17, -5.7992617313703252e-18, -4.2600951064036431e-19, -2.0486540122404041e-20, -7.0409948608018678e-22, -2.3501057946233750e-23], [2.4824814114296471e-17, 1.3524317495281538e-17, 2.2679732436930793e-17, 5.1866133780505039e-17, 6.4863739203554789e-17, 4.8006597815551161e-17, 2.2496246902112677e-17, 6.8634524088691599e-18, 1.3738601211301025e-18, 1.8020425276118908e-19, 1.5483408434072947e-20, 8.8899802104650092e-22, 3.7514891021899783e-23, 1.5528055334163663e-24], [-1.6701736874056306e-18, -3.8234715009332562e-19, 3.6616950139271764e-19, -9.2608030014179535e-20, -7.3083071602338631e-19, -7.7172950123564108e-19, -4.3554038267414989e-19, -1.5327501987952509e-19, -3.5075538119316533e-20, -5.2814475262850060e-21, -5.2711444117366476e-22, -3.5824687335857800e-23, -1.8335261844248854e-24, -9.2439342862797711e-26], [-7.4987969430186022e-20, -1.1295396877775808e-20, 3.9179862169141428e-20, 4.4423440661342200e-20, 3.0791064522569126e-20, 1.8297033497972174e-20, 9.1369939214473985e-21, 3.3766677416503459e-21, 8.5913414477635170e-22, 1.4698922228381842e-22, 1.6923290618456644e-23, 1.3507753783533512e-24, 8.2916126723481404e-26, 5.0108154036814019e-27], [-1.1427612673706684e-21, -1.9217171499250947e-22, 4.7919970861105776e-22, 3.6486698198305775e-22, -9.0247072730121010e-24, -1.8162727278949496e-22, -1.4916980138370143e-22, -6.8060559209454648e-23, -1.9956448399979404e-23, -3.8939046235908388e-24, -5.1502936957284238e-25, -4.7941015469113137e-26, -3.4935382840271928e-27, -2.4945435467137622e-28], [1.6737171388806145e-23, 2.6421683991944126e-24, -7.3070599617598773e-24, -5.5955267961918296e-24, 1.2999298836956700e-25, 3.0286451819778053e-24, 2.7068904616785508e-24, 1.3668085109174531e-24, 4.4847733112846466e-25, 9.8836209286424344e-26, 1.4927322027727664e-26, 1.6094952692600501e-27, 1.3791981822526687e-28, 1.1486154467520281e-29], [1.2563346514514863e-24, 1.9547870397722956e-25, -5.9221816654411925e-25, -5.7686854978903396e-25, -2.8763303961427043e-25, -1.1896629129670654e-25, -5.7551317584781275e-26, -2.7327938223038046e-26, -9.7433031251418005e-27, -2.4082139004872720e-27, -4.1320306621023768e-28, -5.1275365306940709e-29, -5.1199633263865668e-30, -4.9134545412648831e-31]],
        [[6.0852488503670789e-2, 4.3488989669484043e-2, 2.2128280838557346e-2, 7.9545950794618793e-3, 1.9956456170574430e-3, 3.4335406822730125e-4, 3.9550141645166145e-5, 2.9523537376566187e-6, 1.3667860043089563e-7, 3.6958956980444395e-9, 5.3760148016615515e-11, 3.7634106191739234e-13, 1.1217973785474914e-15, 1.6546420017696034e-18], [-1.2501347742379644e-3, -9.9637946580337601e-4, -6.1454060813690840e-4, -2.8155597994186644e-4, -9.2271775949734193e-5, -2.0948304476500933e-5, -3.1969433770399866e-6, -3.1729291123504385e-7, -1.9661059609266933e-8, -7.2104408034585807e-10, -1.4567715740852306e-11, -1.4762213568899746e-13, -6.8263660775981602e-16, -1.6875296134758737e-18], [1.3331820711874105e-5, 1.5771734966756561e-5, 1.4744225134038205e-5, 9.2792818067842111e-6, 3.8480066545940580e-6, 1.0510482883994810e-6, 1.8796478553047979e-7, 2.1652445498943507e-8, 1.5618910509537158e-9, 6.7640112952822928e-11, 1.6583952927487584e-12, 2.1360570901091873e-14, 1.3582617521728144e-16, 5.1823071462384223e-19], [-1.5563677945034036e-7, -2.6922261405364646e-7, -3.2364427266157770e-7, -2.4307352640299782e-7, -1.1791164683859103e-7, -3.7619941924047491e-8, -7.8929099017471392e-9, -1.0738001474862439e-9, -9.2296361628715901e-11, -4.8239075669598495e-12, -1.4562001322761812e-13, -2.3882619207395615e-15, -2.0527358245429153e-17, -1.1596124088288036e-19], [2.1946109664198670e-9, 4.5734670603656357e-9, 6.5291472310185995e-9, 5.8261901201260061e-9, 3.3517673746440371e-9, 1.2608839437188054e-9, 3.1010331966269420e-10, 4.9318831003847544e-11, 4.9666808032917582e-12, 3.0685510767612993e-13, 1.1149282391081888e-14, 2.2727722074122767e-16, 2.5675333716925197e-18, 2.0635369035540112e-20], [3.6547091728520625e-11, -6.2891357718611522e-11, -1.5877630894288544e-10, -1.6700530676569795e-10, -1.0624853554963357e-10, -4.3957247560764626e-11, -1.1998480780058438e-11, -2.1455772242254958e-12, -2.4651998928915784e-13, -1.7674753947937614e-14, -7.6186131958162286e-16, -1.9026754582670882e-17, -2.7711752401005063e-19, -3.0672802474013379e-21], [3.1624293668477230e-12, 1.6568917199918262e-12, 1.2052686187062537e-12, 1.8642928008629765e-12, 1.8663499412180223e-12, 1.0673128130925712e-12, 3.6993123846777731e-13, 8.0152242168443717e-14, 1.0910642579682198e-14, 9.2162483123459565e-16, 4.7197261812331934e-17, 1.4334660946891761e-18, 2.6509430834202854e-20, 3.9299168045284523e-22], [1.4068595219248093e-14, -1.5514809003885421e-14, -5.5197814256205756e-14, -7.6264130832769818e-14, -6.4578495297776318e-14, -3.5639500816504176e-14, -1.2924484833436621e-14, -3.0627413722816247e-15, -4.6819206487484593e-16, -4.5298554504564681e-17, -2.7116681691188239e-18, -9.8929120738496082e-20, -2.2892492527584104e-21, -4.4356149732653192e-23], [-6.7673893672318078e-15, -8.7760265900587950e-16, 3.9725428059799360e-15, 4.4971337407379623e-15, 2.8532372190224475e-15, 1.3107298348355119e-15, 4.5285533428997012e-16, 1.1251202945606037e-16, 1.9003178588787366e-17, 2.0905137177018401e-18, 1.4539958989545550e-19, 6.3216929231887539e-21, 1.8080627008594493e-22, 4.4811910024130850e-24], [-3.9857381481248136e-16, -7.0278381930084323e-17, 1.6802546880901705e-16, 1.4806366217133828e-16, 4.4951835405981468e-17, -4.7996788080269465e-18, -8.7061045778613087e-18, -3.3265921642275108e-18, -6.9940194638563304e-19, -9.0331159645508063e-20, -7.3250178390377727e-21, -3.7732753332939026e-22, -1.3190888589932187e-23, -4.1020526337651931e-25], [-4.0324908001522287e-18, -6.3425189316302542e-19, 2.1018508595431040e-18, 2.4040704569427694e-18, 1.6092959866188129e-18, 8.6381872963456406e-19, 3.7597895225899066e-19, 1.2029256632011989e-19, 2.6262703301673419e-20, 3.7711019265456465e-21, 3.5037762160825040e-22, 2.1189305040704762e-23, 8.9585248292761736e-25, 3.4352943032135771e-26], [6.8473841138740753e-19, 1.0859364634500234e-19, -3.2257378716856536e-19, -3.1538401332471612e-19, -1.5084713434258565e-19, -4.9485325395586759e-20, -1.4434498192310549e-20, -4.0662402881922988e-21, -9.3289908306423383e-22, -1.4980196238987525e-22, -1.5932731519863038e-23, -1.1251357035431657e-24, -5.6987678922892969e-26, -2.6526315937867531e-27], [4.2321639465771979e-20, 6.9528476302248867e-21, -1.9453539939700364e-20, -1.8623871815347693e-20, -8.0113958623110481e-21, -1.7549525328131444e-21, -7.2256980532836113e-23, 7.9785140463044667e-23, 2.9252679902526294e-23, 5.6440664239007466e-24, 6.9165972783626693e-25, 5.6750255420851429e-26, 3.4127885504402090e-27, 1.9008454435644939e-28], [6.9157919703923475e-22, 1.2734544195341165e-22, -3.1085989323797317e-22, -3.1861531874507830e-22, -1.5529603376757260e-22, -4.9344432673676594e-23, -1.3393546960926459e-23, -3.8747022969239474e-24, -1.0439065518060190e-24, -2.0961467399536927e-25, -2.8820382351348876e-26, -2.7239505465753361e-27, -1.9269543155824292e-28, -1.2663477543438426e-29]],
        [[5.8453433186101842e-2, 4.1612997443200115e-2, 2.1005955052371646e-2, 7.4574404546826819e-3, 1.8379511419641342e-3, 3.0863920501758036e-4, 3.4409226558972576e-5, 2.4578571498529979e-6, 1.0709815322921076e-7, 2.6567038613864664e-9, 3.3927165214050503e-11, 1.9134386351246752e-13, 3.7405258938271064e-16, 1.9043444284873256e-19], [-1.1502731993481829e-3, -8.8196691368092424e-4, -5.1057824641021274e-4, -2.1764478175618205e-4, -6.6383714775055199e-5, -1.4061828572990461e-5, -2.0033419785887647e-6, -1.8490238793137490e-7, -1.0545456730577235e-8, -3.4876056483953785e-10, -6.1141594147267608e-12, -4.9759893349657961e-14, -1.5409534627665278e-16, -1.4984751884163111e-19], [1.1711284718858859e-5, 1.2945001858400796e-5, 1.1386930689928010e-5, 6.8182226494109862e-6, 2.6914072221267931e-6, 6.9542693068419808e-7, 1.1639158376182707e-7, 1.2359332420536246e-8, 8.0478493005072068e-10, 3.0520719012528047e-11, 6.2475396986288045e-13, 6.1713720739034488e-15, 2.5117245083628924e-17, 3.8325037722444850e-20], [-1.1102263253392131e-7, -2.0418303630410838e-7, -2.4320774114642055e-7, -1.7451549482384930e-7, -7.9258486608502206e-8, -2.3341936957864991e-8, -4.4651504890193066e-9, -5.4646392286069803e-10, -4.1506154832387226e-11, -1.8659449327251235e-12, -4.6323011989659432e-14, -5.7519036889464204e-16, -3.1403116285043101e-18, -7.3655003755997497e-21], [3.5363326157107792e-9, 3.6522229671166224e-9, 3.6146488135901768e-9, 2.8648694590389852e-9, 1.5881253257882248e-9, 5.8132304678930599e-10, 1.3711146115287553e-10, 2.0426305945481648e-11, 1.8704532573024390e-12, 1.0109819253896085e-13, 3.0401028657255948e-15, 4.6816358470700472e-17, 3.3461179109136894e-19, 1.1556228818994636e-21], [8.0462117713156463e-11, -3.3681124439451405e-11, -1.2885753064315539e-10, -1.2700614498246042e-10, -7.1348949438625863e-11, -2.5633356626892763e-11, -6.0438703088625714e-12, -9.2936653302869464e-13, -9.0902566629561397e-14, -5.4303427375728680e-15, -1.8707437128556792e-16, -3.4466769576261691e-18, -3.1419687401667521e-20, -1.5442803281261669e-22], [-1.3361907028232063e-12, 4.9789754263755426e-13, 2.2227321355224288e-12, 2.4417519673310233e-12, 1.5588603439764240e-12, 6.4567513190232522e-13, 1.7675268073530431e-13, 3.1627475714164253e-14, 3.6044162378586743e-15, 2.5190222593267643e-16, 1.0262973706023506e-17, 2.2891209109335730e-19, 2.6487075484266263e-21, 1.8060408098667615e-23], [-3.6903717663187721e-13, -7.3688794333363760e-14, 1.4107357818310943e-13, 1.2874769505199858e-13, 4.5231062612209701e-14, 4.3784660152639491e-15, -1.9008026585722151e-15, -7.5356681479780815e-16, -1.2189889834176184e-16, -1.0660301052169162e-17, -5.2246207559168296e-19, -1.4065831696397709e-20, -2.0411842623655278e-22, -1.8838117324207841e-24], [-1.1627683475832031e-14, -1.8416730445868920e-15, 5.7739925212567759e-15, 5.9400683380590827e-15, 3.0323829516080866e-15, 1.0045950632754554e-15, 2.4018235733883809e-16, 4.2927768407359123e-17, 5.5398811764670637e-18, 4.7964526440080750e-19, 2.5826260060712921e-20, 8.1189073657258253e-22, 1.4541687809550855e-23, 1.7767096865906430e-25], [5.5371466357906297e-16, 8.7792257941720363e-17, -2.6404445111447613e-16, -2.6016287626214390e-16, -1.2345555838462960e-16, -3.6983084292425408e-17, -8.0515363349097101e-18, -1.4039460546337677e-18, -1.9332033031699009e-19, -1.8883302259414245e-20, -1.1776354671369634e-21, -4.3842761789198186e-23, -9.6481755219853762e-25, -1.5311805971358602e-26], [5.5003838125170075e-17, 9.2850694458751510e-18, -2.5105219458331505e-17, -2.4349025532411281e-17, -1.0758958209819410e-17, -2.6386014456113916e-18, -3.4035820130584334e-19, -1.0043840909289302e-20, 3.7218246838873435e-21, 6.4075038654984974e-22, 5.0420037729732434e-23, 2.2403628004752453e-24, 6.0063244640879086e-26, 1.2158656970656071e-27], [7.6411076036417879e-19, 1.4648556352658823e-19, -3.4008499891949195e-19, -3.5492118842907962e-19, -1.7362173753705832e-19, -5.1906072744793371e-20, -1.0703245109555666e-20, -1.7383846877155780e-21, -2.4339782273490973e-22, -2.7483679823828844e-23, -2.1713815978020288e-24, -1.0953257350859168e-25, -3.5273380518600796e-27, -8.9561929123697073e-29], [-1.1532291141603772e-19, -1.8386454872234363e-20, 5.3616512798822139e-20, 5.1217108099711641e-20, 2.2588485102170046e-20, 5.7471568238305352e-21, 9.0411869535534079e-22, 9.7611318110471795e-23, 9.4460722576511032e-24, 9.8557645840520118e-25, 8.6478015045230686e-26, 5.0818816141629496e-27, 1.9612951718615265e-28, 6.1541546478874023e-30], [-6.9089682532831311e-21, -1.1879040436781462e-21, 3.1518242851426576e-21, 3.1011235618951594e-21, 1.4060317258645601e-21, 3.6645127381967800e-22, 5.6641941424521585e-23, 4.8345032003802061e-24, 1.2051596432939103e-25, -2.1793142856678955e-26, -3.1750844815510948e-27, -2.2516623810764706e-28, -1.0343544240517422e-29, -3.9499329162632253e-31]],
        [[5.6243098952527165e-2, 3.9945532518194344e-2, 2.0067233494239225e-2, 7.0705052101954441e-3, 1.7239465158006096e-3, 2.8528158368491410e-4, 3.1185186440414199e-5, 2.1693045392416346e-6, 9.1152765317884674e-8, 2.1475107498336931e-9, 2.5375799734843791e-11, 1.2578730319640532e-13, 1.9015073144079160e-16, 4.5479018566131589e-20], [-1.0608583842733793e-3, -7.8726501887876335e-4, -4.3034302449612753e-4, -1.7086179467756180e-4, -4.8317471516408682e-5, -9.4938035059943839e-6, -1.2569727610782571e-6, -1.0787321562161015e-7, -5.7029063445691275e-9, -1.7318226227428007e-10, -2.7294060985092423e-12, -1.9064235592047570e-14, -4.5055566555889175e-17, -2.1841947325992167e-20], [1.0755353622537740e-5, 1.0823219689693609e-5, 8.7439800800101606e-6, 4.9294594361534789e-6, 1.8537375753025325e-6, 4.5716219370151120e-7, 7.2708834186453458e-8, 7.2686318083322467e-9, 4.3903545894552997e-10, 1.5097870958648968e-11, 2.7018851390035485e-13, 2.1855848621639198e-15, 6.3217649925196440e-18, 4.4467632810432097e-21], [-4.7197342694069884e-8, -1.5124606275744572e-7, -2.0155246005951260e-7, -1.4437819727768834e-7, -6.2685237773625387e-8, -1.7216084301158064e-8, -3.0147774442914879e-9, -3.3212228223126397e-10, -2.2298537684728259e-11, -8.6571061748476626e-13, -1.7918388786829014e-14, -1.7422533066932348e-16, -6.4941954712939317e-19, -6.9298886460231553e-22], [3.9023299853911882e-9, 2.9181383214587207e-9, 1.9371940942840521e-9, 1.2532524401092730e-9, 6.6648123502588327e-10, 2.4445057903675789e-10, 5.7336455815454895e-11, 8.3083105396148393e-12, 7.1977862489858440e-13, 3.5563915834460123e-14, 9.3215988477034938e-16, 1.1583510578412931e-17, 5.7307762962247407e-20, 9.1473085823068471e-23], [-8.4853787079565233e-11, -4.7755612569483799e-11, -2.2546606339749918e-11, -1.8710628153441709e-11, -1.4734997692462117e-11, -6.9775411944568191e-12, -1.9368325719844440e-12, -3.1943022941867315e-13, -3.1081091563084504e-14, -1.7283501091346700e-15, -5.1729544153975555e-17, -7.5630459760104076e-19, -4.6662484216978951e-21, -1.0597722754625448e-23], [-1.1133734298090625e-11, -1.4402242013982312e-12, 6.0836701878198118e-12, 6.0775122352539081e-12, 2.9687344434867270e-12, 8.8108345278877070e-13, 1.6886322048461119e-13, 2.1292884099018056e-14, 1.7542715664374824e-15, 9.1259439966629643e-17, 2.8036600794293618e-18, 4.5818442734559585e-20, 3.4543014595061184e-22, 1.0953090038380103e-24], [-6.9141586702441756e-14, -2.0533094186109707e-14, 1.3931186495380990e-14, 1.1813440172195159e-14, 6.3174624051801148e-16, -2.5066868785580414e-15, -1.2759902032774080e-15, -3.0052487472144635e-16, -3.9158640540006182e-17, -2.8871892203841695e-18, -1.1678178273002310e-19, -2.4205623334652354e-21, -2.3330599484732757e-23, -1.0257064132887657e-25], [3.4639358896155302e-14, 5.9924302073676271e-15, -1.5585268232447913e-14, -1.5163426912375755e-14, -6.7084484853196345e-15, -1.6635040991081353e-15, -2.3138567031259391e-16, -1.5206422466542569e-17, 7.0765798635910675e-20, 7.6844969896648277e-20, 4.7297447638960099e-21, 1.2362279009414506e-22, 1.4844524360426267e-24, 8.8099302850333755e-27], [1.0452208045093750e-15, 1.8711963848075550e-16, -4.7512593258098607e-16, -4.7998994385985243e-16, -2.2582765528766002e-16, -6.2826830761989822e-17, -1.1069055126936274e-17, -1.2888969735694280e-18, -1.0418752428194323e-19, -6.0855807901958503e-21, -2.4936176724934404e-22, -6.3813413876035727e-24, -8.9366982361277556e-26, -6.9929736981775525e-28], [-8.4424120982469125e-17, -1.3898849952124552e-17, 3.8995078528711104e-17, 3.7762455870542773e-17, 1.6895272241101345e-17, 4.3650430296017247e-18, 6.8698984915260788e-19, 6.7692447906040293e-20, 4.4543125002635279e-21, 2.2650322117048722e-22, 9.6531876099405689e-24, 2.9054907360617074e-25, 5.0251735359775143e-27, 5.1616337694067456e-29], [-5.2726650784590756e-18, -9.3419673208636871e-19, 2.3864335767932110e-18, 2.3784733008419642e-18, 1.0925745539006632e-18, 2.8989146970292678e-19, 4.6253916773434272e-20, 4.3410358548538794e-21, 2.1556951678567329e-22, 3.0541029488785465e-24, -2.1258962038867027e-25, -1.2025169382998415e-26, -2.6841992821828789e-28, -3.5642441542331736e-30], [1.3687433268329829e-19, 2.0111147708081877e-20, -6.4755760475652566e-20, -5.9874020756928764e-20, -2.5339962280948735e-20, -5.9930928279648919e-21, -8.0144171759775339e-22, -5.4310197433721395e-23, -7.1786999473401929e-25, 1.5977584336625138e-25, 1.3566286844270040e-26, 5.6477509822570711e-28, 1.3869697692550067e-29, 2.3128017978503007e-31], [1.9750820310867766e-20, 3.4311942146888903e-21, -8.9893136718346883e-21, -8.8875590706323103e-21, -4.0530296826575928e-21, -1.0679237142978225e-21, -1.7008907304415176e-22, -1.6337280400044137e-23, -9.2855396202925215e-25, -3.1731263027625969e-26, -8.2329124515337815e-28, -2.4567853727740773e-29, -6.7685738011651498e-31, -1.4103684996747155e-32]],
        [[5.4206240175518412e-2, 3.8452346060328209e-2, 1.9269219878965103e-2, 6.7629830010885375e-3, 1.6398873469405909e-3, 2.6934134634496380e-4, 2.9148240553101670e-5, 2.0004635153126213e-6, 8.2527125809751223e-8, 1.8945404037518464e-9, 2.1536903741935600e-11, 1.0017895896729177e-13, 1.3360885623781312e-16, 2.1826628817073372e-20], [-9.7623635050576967e-4, -7.0722938816726887e-4, -3.6952527137349621e-4, -1.3799610087857842e-4, -3.6314323178870734e-5, -6.6001330118982507e-6, -8.0605967637269934e-7, -6.3730713234934183e-8, -3.0994945787073464e-9, -8.6257107506576327e-11, -1.2338758205209036e-12, -7.6422853900344767e-15, -1.5042788688144135e-17, -4.7275802971221536e-21], [1.0464589346560654e-5, 9.2512856394228211e-6, 6.5198865030388962e-6, 3.3283047103064085e-6, 1.1671862200286867e-6, 2.7279977021896784e-7, 4.1395965881456519e-8, 3.9489640392146091e-9, 2.2637400848955053e-10, 7.3008542712551320e-12, 1.1987516680125451e-13, 8.5302484552108047e-16, 1.9730692198909709e-18, 8.0586609748944168e-22], [-1.1106980376520276e-8, -1.1385007659222369e-7, -1.6718118847522196e-7, -1.2034202978482958e-7, -5.0975247503081083e-8, -1.3415719688055467e-8, -2.2165475464657151e-9, -2.2669047314502120e-10, -1.3865005972016270e-11, -4.7863954356948098e-13, -8.5114069238884750e-15, -6.7240758289342274e-17, -1.8207076578577496e-19, -1.0092632168080507e-22], [6.1542942490367851e-11, 1.6906559000252045e-9, 2.6699230468642048e-9, 2.0625405015634701e-9, 9.5071937505422318e-10, 2.7653507790716860e-10, 5.1271042734758603e-11, 5.9730231671566634e-12, 4.2263752744840846e-13, 1.7174451414946325e-14, 3.6740285372414878e-16, 3.6026106264088802e-18, 1.2784067473640368e-20, 1.0595472393662223e-23], [-2.4578116676127254e-10, -6.6500748557681362e-11, 6.9965822913220513e-11, 7.4022422727701011e-11, 3.1157121706782271e-11, 6.8438083650073962e-12, 7.4059369529834415e-13, 1.8132243906586688e-14, -3.7692537648946726e-15, -3.6480901412056108e-16, -1.2536453077618577e-17, -1.7407822982550439e-19, -8.4498736565994371e-22, -1.0246903037781424e-24], [1.9442274589742994e-12, 6.3322543018133219e-13, -2.5874477236002469e-13, -2.1421246862154348e-13, 1.3696790634593014e-14, 5.4713997932127719e-14, 2.2076374726098560e-14, 4.2545187104889980e-15, 4.4574365954579461e-16, 2.5520949898854798e-17, 7.5927744625555048e-19, 1.0580950736730750e-20, 5.7608352393278962e-23, 9.2053076253280147e-26], [7.7310511362279671e-13, 1.3031562373559206e-13, -3.6151701617099531e-13, -3.5939092013375172e-13, -1.6667411101865355e-13, -4.5249690329629670e-14, -7.5820800597879439e-15, -7.9227809506391528e-16, -5.1297230893255045e-17, -2.0252772676807009e-18, -4.7231990469561556e-20, -6.0315342261594045e-22, -3.5709138525709911e-24, -7.5525455021537861e-27], [-6.3807093485415006e-15, -8.6928215072794690e-16, 3.1781389758183076e-15, 2.9857635678246301e-15, 1.3274448570379303e-15, 3.4947219923435017e-16, 5.8955252448869053e-17, 6.7752485254942973e-18, 5.5668196343524084e-19, 3.2125341638656323e-20, 1.1633693265404447e-21, 2.2373907843810853e-23, 1.8821281342147945e-25, 5.7147036249433960e-28], [-2.5630744625534282e-15, -4.4994085830563337e-16, 1.1616250415905417e-15, 1.1517019685511604e-15, 5.2580237821551811e-16, 1.3837021677932176e-16, 2.1866304311054566e-17, 2.0435888616917460e-18, 1.0596750574975067e-19, 2.5539602257680905e-21, 7.0373961917513352e-24, -7.0891370284717242e-25, -9.7058795189543943e-27, -4.0810586225009689e-29], [2.3309218568561068e-17, 3.1236109116919803e-18, -1.1211907080176598e-17, -1.0008785290816084e-17, -4.0378716874042081e-18, -8.7442986612305779e-19, -9.5416710018505416e-20, -2.6198551169714047e-21, 4.8163005010184303e-22, 5.3765769069752255e-23, 2.3546767469267973e-24, 5.1153049668568712e-26, 5.4791378126193758e-28, 2.7619330051210392e-30], [8.4422283654588087e-18, 1.4911811384764721e-18, -3.8260739244623301e-18, -3.8107696583994373e-18, -1.7511630728171104e-18, -4.6600721260428798e-19, -7.5197532171504606e-20, -7.3399069322297106e-21, -4.2205080213138861e-22, -1.3779457354444702e-23, -2.5347250566102495e-25, -2.9948937849922354e-27, -2.7829296801614368e-29, -1.7524325888383334e-31], [-8.2313158411681986e-20, -1.0030913287256932e-20, 4.0365302394362133e-20, 3.5115057696166011e-20, 1.3764782541314053e-20, 2.8612718111992265e-21, 2.9436769440674567e-22, 7.8803294366588040e-24, -9.9461976922419222e-25, -7.6744163115573695e-26, -1.1056589725193680e-27, 3.5895828152677642e-29, 1.0892245313148907e-30, 1.0459855617618604e-32], [-2.7789577885640594e-20, -4.9590746272448929e-21, 1.2559258147710165e-20, 1.2563908699353913e-20, 5.7973274768353284e-21, 1.5498432408997375e-21, 2.5119107119994339e-22, 2.4553141127473228e-23, 1.3961143468680882e-24, 4.2942016797603282e-26, 6.0959175108110916e-28, 1.6827515537568684e-30, -4.5485857896815939e-32, -5.9702247192955925e-34]],
        [[5.2336857404249576e-2, 3.7107835896217724e-2, 1.8576547839574411e-2, 6.5095042491802807e-3, 1.5748687624208126e-3, 2.5787278098512168e-4, 2.7793571502245624e-5, 1.8971470685296266e-6, 7.7690699605769871e-8, 1.7652616701173649e-9, 1.9765584174078792e-11, 8.9722870182485179e-14, 1.1422472303985620e-16, 1.6328641822991374e-20], [-8.9336155572745592e-4, -6.3831441470079911e-4, -3.2457527430471955e-4, -1.1648909881640255e-4, -2.9124427668541155e-5, -4.9774735133759533e-6, -5.6634208508862917e-7, -4.1364836537817485e-8, -1.8431529255138854e-9, -4.6575426469827697e-11, -5.9801746216205949e-13, -3.2640370437256454e-15, -5.4466125347619965e-18, -1.2703457737875165e-21], [1.0200295092507926e-5, 8.0090655229640241e-6, 4.8071185337577552e-6, 2.1221855419398745e-6, 6.6366492477821393e-7, 1.4209516905522314e-7, 2.0131162769100848e-8, 1.8141555321087240e-9, 9.8803957067345826e-11, 3.0275612697407801e-12, 4.6907462550897597e-14, 3.0913762305493426e-16, 6.3097555707514408e-19, 1.9051033407929340e-22], [-4.0876460622982403e-8, -9.5591663800825540e-8, -1.1642955909531258e-7, -7.8594852039383819e-8, -3.2073114315707204e-8, -8.1830017473629896e-9, -1.3093189522281580e-9, -1.2902063391084878e-10, -7.5367471546242905e-12, -2.4511034859632581e-13, -4.0172870311284696e-15, -2.8149097458772426e-17, -6.2380757400420581e-20, -2.2092528443782474e-23], [-3.0441916954175992e-9, 7.4010325825213892e-10, 3.3779070667755757e-9, 2.8632804689452074e-9, 1.2841316432980031e-9, 3.4641766248831981e-10, 5.7838409390969818e-11, 5.9286560045041568e-12, 3.6116460427790440e-13, 1.2338732861774827e-14, 2.1527028500087995e-16, 1.6437950723563661e-18, 4.1585003567600283e-21, 1.9031440599648768e-24], [-2.7009775110924682e-11, -2.2194989756498512e-11, -1.7094468224842746e-11, -1.1984242711120252e-11, -6.3356521759311187e-12, -2.2286507920441926e-12, -4.9521280671849144e-13, -6.7388076538285047e-14, -5.4140987226855670e-15, -2.4299654180532298e-16, -5.5833362570112293e-18, -5.6903042109821758e-20, -1.9903598964171943e-22, -1.3953106542728440e-25], [1.1304166961895516e-11, 2.2014395098006060e-12, -4.7105699309124083e-12, -4.6901271988985195e-12, -2.1007932412311413e-12, -5.3463620802411349e-13, -8.0241342396806134e-14, -6.9279579153173975e-15, -3.1591917093109759e-16, -5.9203670511402496e-18, 1.4308309576223725e-20, 1.4320183955306894e-21, 9.2266914873433861e-24, 1.0161286404107848e-26], [-2.2717467899658960e-13, -4.1568163670318962e-14, 9.7762075456534973e-14, 9.5238720198104502e-14, 4.1777037430014542e-14, 1.0276486162436740e-14, 1.4456018175475483e-15, 1.0790051127009920e-16, 3.0534293254212951e-18, -7.2540662591728834e-20, -6.0667802826061652e-21, -1.0933997377120113e-22, -6.0629687587218771e-25, -7.5962247221293377e-28], [-2.9155799250610069e-14, -5.1523517075470486e-15, 1.3274279414724103e-14, 1.3283038525233503e-14, 6.1507626552078717e-15, 1.6565251187737517e-15, 2.7233416113671375e-16, 2.7356773518922871e-17, 1.6413494979549630e-18, 5.6491098737160400e-20, 1.0536380753977317e-21, 9.8403567604966780e-24, 4.0153220632076493e-26, 5.2884291948901909e-29], [1.4665552140862440e-15, 2.5380363020944757e-16, -6.6912493069585504e-16, -6.6142006211911027e-16, -3.0188359253489357e-16, -7.9707192366907708e-17, -1.2747083788958730e-17, -1.2322451856893963e-18, -7.0149829682947768e-20, -2.2574261592100394e-21, -3.9353099823673483e-23, -3.6402851343762610e-25, -1.7269922116929266e-27, -3.2240372200020609e-30], [5.4308275453271451e-17, 1.0096406156851549e-17, -2.4253431053708595e-17, -2.4705693047254241e-17, -1.1600304233510995e-17, -3.1670596909019254e-18, -5.2648512838386749e-19, -5.2999587188467461e-20, -3.1103099222442519e-21, -9.8428388455891970e-23, -1.4246650940057275e-24, -5.1168175751830523e-27, 3.8425213302571480e-29, 1.8112615893885576e-31], [-6.0010415038874391e-18, -1.0598549738225828e-18, 2.7193819555338519e-18, 2.7076649041537487e-18, 1.2433920346118843e-18, 3.3035198544808093e-19, 5.3103400426653446e-20, 5.1336386030450954e-21, 2.8759356812637949e-22, 8.6861882066177317e-24, 1.2316425183000570e-25, 5.5660644231985993e-28, -1.3899941766231540e-30, -1.0493613609263861e-32], [-1.8491012689955582e-20, -5.6067810191594450e-21, 6.7899487040832340e-21, 9.4107368678116996e-21, 5.5660244262240841e-21, 1.9051187531287672e-21, 3.9754090145979282e-22, 5.0459326727134864e-23, 3.7859163132145329e-24, 1.5969488400289552e-25, 3.5304180178525187e-27, 3.8050365411052416e-29, 2.0226814043714511e-31, 6.2904653526877467e-34], [1.9313622158739330e-20, 3.5001222294087283e-21, -8.6921165724863577e-21, -8.7562430287106349e-21, -4.0690340785159866e-21, -1.0977167332477544e-21, -1.8008233669972768e-22, -1.7903186777548221e-23, -1.0449131216434090e-24, -3.3777023370229148e-26, -5.5259971531737601e-28, -4.0590190943037929e-30, -1.3122275869512108e-32, -3.4091703676130830e-35]],
        [[5.0629622367663339e-2, 3.5891776948488420e-2, 1.7962040486535454e-2, 6.2910338564385912e-3, 1.5209413285793472e-3, 2.4880554828100816e-4, 2.6782435390529846e-5, 1.8250678893516041e-6, 7.4570939898001322e-8, 1.6891156752186641e-9, 1.8827919159995869e-11, 8.4862538976051564e-14, 1.0664458143484864e-16, 1.4736627517460040e-20], [-8.1451065128953359e-4, -5.7864698116565390e-4, -2.9084699154455402e-4, -1.0255636105088453e-4, -2.5029651094496046e-5, -4.1463939687776585e-6, -4.5372117681382585e-7, -3.1582817855482568e-8, -1.3266928608676926e-9, -3.1175868185312645e-11, -3.6547196921826856e-13, -1.7724597897334412e-15, -2.5066517965228023e-18, -4.4061234903022684e-22], [9.4384642975985539e-6, 6.9260368422210994e-6, 3.7070108427329958e-6, 1.4300897177243771e-6, 3.9075196468843347e-7, 7.3871283404981413e-8, 9.3731752882349438e-9, 7.6713186671385026e-10, 3.8390227921817894e-11, 1.0899688267867657e-12, 1.5708287266945091e-14, 9.5997014009008410e-17, 1.7833467264058534e-19, 4.5201049579987111e-23], [-8.2545499323860575e-8, -8.5042660283815185e-8, -6.9774997602418721e-8, -3.9351403645168235e-8, -1.4622821800688208e-8, -3.5257946566671263e-9, -5.4230635256749222e-10, -5.1757373984854870e-11, -2.9340990173727340e-12, -9.2389204690548420e-14, -1.4553345827946342e-15, -9.6441601686179868e-18, -1.9460076753988742e-20, -5.5194533360875396e-24], [-1.7074269506751219e-9, 6.7325427378057450e-10, 2.2734087498740783e-9, 1.8609775402999429e-9, 8.1648528370546932e-10, 2.1545649481536394e-10, 3.5055324240960950e-11, 3.4801410283404154e-12, 2.0352203083518465e-13, 6.5899367033565588e-15, 1.0684561785384638e-16, 7.3328602367649661e-19, 1.5585845209636052e-21, 4.9249523424925605e-25], [1.1486877557528142e-10, 7.2266296766355672e-12, -7.3086479854331384e-11, -6.8164877631439388e-11, -3.1332419074933231e-11, -8.5037326845737674e-12, -1.4162226296830577e-12, -1.4395811696604839e-13, -8.6491691738213038e-15, -2.8954958759220428e-16, -4.9052987467323216e-18, -3.5825230566316048e-20, -8.4019103491347466e-23, -3.2300910033198629e-26], [2.1013882740778376e-13, 1.9366108012120618e-13, 1.9027912285603833e-13, 1.6270881409726541e-13, 9.4956557880327051e-14, 3.4847658570439960e-14, 7.8718741423464996e-15, 1.0751042891037522e-15, 8.6004511012394952e-17, 3.8173119897532728e-18, 8.6024550878690739e-20, 8.4840823985938059e-22, 2.7897131455075359e-24, 1.6660532279582614e-27], [-3.2366091380625798e-13, -5.8961333208179971e-14, 1.4282226803044362e-13, 1.4199547174711907e-13, 6.4585654023004420e-14, 1.6890889160521169e-14, 2.6503867450663477e-15, 2.4687629569496319e-16, 1.3036114439976027e-17, 3.5615941969163946e-19, 4.1669835246704473e-21, 1.0605264233116946e-23, -5.0859249392547460e-26, -8.2221648995942810e-29], [1.4319249463156566e-14, 2.5483621969624372e-15, -6.4384927086318855e-15, -6.3987606500012536e-15, -2.9233818629344706e-15, -7.6991440836301996e-16, -1.2197989230040140e-16, -1.1510377247428697e-17, -6.1860113220307410e-19, -1.7328544495870796e-20, -2.1095383349557457e-22, -5.9869146700495479e-25, 2.6190131856380501e-27, 5.1157598880372709e-30], [2.4991271768259127e-16, 4.5671532462415105e-17, -1.1273292274269500e-16, -1.1452569312770101e-16, -5.3854402279741052e-17, -1.4792700410925142e-17, -2.4949497363562234e-18, -2.5894035584528916e-19, -1.6168590337358901e-20, -5.8159442261533019e-22, -1.1247470265257917e-23, -1.0464846093384284e-25, -3.8391946720348242e-28, -3.6485436150029259e-31], [-5.0797568321155632e-17, -9.0941262778600790e-18, 2.2945049681446399e-17, 2.2995117331156374e-17, 1.0633687790732166e-17, 2.8520130183013676e-18, 4.6464686503719997e-19, 4.5831654755952641e-20, 2.6532844292940580e-21, 8.5191964066574294e-23, 1.3897666018396562e-24, 1.0124301796183641e-26, 2.7553608327683888e-29, 2.2180813673435588e-32], [1.5434573832406031e-18, 2.7043530600023844e-19, -7.0106919282858697e-19, -6.9579688379257500e-19, -3.1854231630822334e-19, -8.4331953946974055e-20, -1.3504802310754052e-20, -1.3019499911197126e-21, -7.3123208643332696e-23, -2.2579840962606975e-24, -3.5242941901129563e-26, -2.5168663446714498e-28, -7.7813901373507849e-31, -9.9183672220786404e-34], [7.2328612363769344e-20, 1.3481132745260345e-20, -3.2296262427943282e-20, -3.2957182503827346e-20, -1.5509401860762627e-20, -4.2486965795908317e-21, -7.1023574995774261e-22, -7.2213664588954824e-23, -4.3229390980613090e-24, -1.4314212943732582e-25, -2.3533302290039231e-27, -1.5622724143031890e-29, -2.2363663050970829e-32, 3.2137574985543889e-35], [-7.3848877357200185e-21, -1.3347566682460321e-21, 3.3259874786840073e-21, 3.3464010273777919e-21, 1.5531173499015422e-21, 4.1830295242100516e-22, 6.8469251007814372e-23, 6.7846856707298357e-24, 3.9385340536884962e-25, 1.2593426886814011e-26, 2.0007460336583996e-28, 1.3145124723155670e-30, 2.2943821670715511e-33, -1.1573030105393241e-36]],
        [[4.9072753388712798e-2, 3.4786795904953089e-2, 1.7407718511912067e-2, 6.0961594490851380e-3, 1.4735796477644503e-3, 2.4100314722399893e-4, 2.5934781214681918e-5, 1.7666074653538814e-6, 7.2144323722560983e-8, 1.6329757793166097e-9, 1.8183479777668944e-11, 8.1828699987120869e-14, 1.0254714323984450e-16, 1.4076559067372466e-20], [-7.4326464476175497e-4, -5.2712709070882680e-4, -2.6402618093595793e-4, -9.2595551670737047e-5, -2.2427995790298913e-5, -3.6780959341281324e-6, -3.9722492197852847e-7, -2.7184672929029031e-8, -1.1170211368836318e-9, -2.5494136305004346e-11, -2.8719286760529006e-13, -1.3149580235499569e-15, -1.6962879356219247e-18, -2.4789092473781159e-22], [8.3545402784990740e-6, 5.9746129584364211e-6, 3.0432268768134533e-6, 1.0949106782536919e-6, 2.7460102685774247e-7, 4.7097842774193472e-8, 5.3789145691178379e-9, 3.9424615719306736e-10, 1.7612912360405383e-11, 4.4534288943749608e-13, 5.6984480498687033e-15, 3.0732081820407831e-17, 4.9623231855966982e-20, 1.0383865114950793e-23], [-9.3362590979052294e-8, -7.3257265274025157e-8, -4.3904618498808341e-8, -1.9334297738601252e-8, -6.0240270892147146e-9, -1.2831449875004470e-9, -1.8052403678877248e-10, -1.6116929346298063e-11, -8.6676881505941527e-13, -2.6099990072438087e-14, -3.9428366739554630e-16, -2.4975559040069448e-18, -4.7448016026221753e-21, -1.1943296395063874e-24], [1.7018571818050802e-10, 7.7760715054252012e-10, 1.0626379226693921e-9, 7.4069980077819188e-10, 3.0505611538960078e-10, 7.7776698998946986e-11, 1.2358676952017955e-11, 1.2028194903824316e-12, 6.8971271356318577e-14, 2.1837802994245933e-15, 3.4405968399240436e-17, 2.2657449805275834e-19, 4.4909308672218732e-22, 1.2066704093780799e-25], [6.0977797134904214e-11, 9.5184096238269277e-13, -4.2925363016084226e-11, -3.8841797951656261e-11, -1.7558828207205220e-11, -4.6885679413688489e-12, -7.6614437475796739e-13, -7.6062933201708957e-14, -4.4338436639532231e-15, -1.4261816890975904e-16, -2.2867730599953033e-18, -1.5405025844849892e-20, -3.1628965448420850e-23, -9.1554742881008552e-27], [-3.0059242256460060e-12, -4.1362655995963192e-13, 1.5617074684302643e-12, 1.5225159647759375e-12, 7.0547017730183784e-13, 1.9123270880276128e-13, 3.1655339735042046e-14, 3.1856072636466917e-15, 1.8867057873765822e-16, 6.1918102208123615e-18, 1.0199738550033420e-19, 7.1451731855787934e-22, 1.5634236340035731e-24, 5.1642433228728263e-28], [3.6345338679792079e-14, 5.3528919881600936e-15, -1.8875636330745950e-14, -1.8997925437399425e-14, -9.1261677532717796e-15, -2.5870948538849651e-15, -4.5248394291711010e-16, -4.8686386036144798e-17, -3.1265822863821391e-18, -1.1320134839072840e-19, -2.1045426691341263e-21, -1.7189594710024549e-23, -4.6279342672633208e-26, -2.1160629700187877e-29], [4.8515516577729922e-15, 8.6942680508602942e-16, -2.1668235688753957e-15, -2.1518243102839989e-15, -9.8080769964007055e-16, -2.5755103394869264e-16, -4.0682177851971174e-17, -3.8311858984149146e-18, -2.0624411251838645e-19, -5.8554820031449951e-21, -7.5490280272700005e-23, -3.1078848246058486e-25, 1.1675765393458420e-28, 6.1721452538383227e-31], [-3.6071986329669045e-16, -6.4475050824828487e-17, 1.6264764811954861e-16, 1.6253674608170917e-16, 7.4832023606923058e-17, 1.9931437155095006e-17, 3.2112910178027056e-18, 3.1100543746245240e-19, 1.7446584628721159e-20, 5.2878683921938206e-22, 7.6824448961245332e-24, 4.2768470305263941e-26, 5.0931583649173579e-29, -1.7999809365422115e-32], [8.7173531196034286e-18, 1.5596737951780084e-18, -3.9333113609766134e-18, -3.9350821135311376e-18, -1.8141025149057220e-18, -4.8388663637297704e-19, -7.8068117523153155e-20, -7.5662922096290104e-21, -4.2398608105929736e-22, -1.2772976555571894e-23, -1.8176786166814131e-25, -9.3612094786353060e-28, -5.5682369984904821e-31, 1.3609114447183590e-33], [3.6001789302259892e-19, 6.5188383240855695e-20, -1.6211781069058548e-19, -1.6331019175136099e-19, -7.5914091663025562e-20, -2.0495566804001010e-20, -3.3678249585097630e-21, -3.3588876074437748e-22, -1.9721962187157520e-23, -6.4438080015694401e-25, -1.0714683991942202e-26, -7.8870121185745780e-29, -2.0524957313563915e-31, -1.2668828767480202e-34], [-3.9428919375677914e-20, -7.1213060229150299e-21, 1.7762933824179699e-20, 1.7866994650793290e-20, 8.2900402319684550e-21, 2.2319307836685028e-21, 3.6515500617036328e-22, 3.6165985588650029e-23, 2.0993376764950563e-24, 6.7260291828842047e-26, 1.0794732267004334e-27, 7.4212204038218161e-30, 1.6805160453634953e-32, 8.1137022885214167e-36], [1.2950652163488218e-21, 2.3253646561695633e-22, -5.8433948633473787e-22, -5.8619377449903258e-22, -2.7125915175807709e-22, -7.2788174558992777e-23, -1.1858444803706297e-23, -1.1683173996953648e-24, -6.7380836398497179e-26, -2.1426366055785501e-27, -3.4137736813412216e-29, -2.3448983599048954e-31, -5.4989984026200422e-34, -3.2527436989679995e-37]],
        [[4.7649591923358292e-2, 3.3777703141837877e-2, 1.6902512173205004e-2, 5.9191035807070375e-3, 1.4307359304366968e-3, 2.3398613379568986e-4, 2.5178259800150333e-5, 1.7149495931089462e-6, 7.0027944323930001e-8, 1.5848640768620808e-9, 1.7644490814854034e-11, 7.9381099738996467e-14, 9.9432849631676635e-17, 1.3634689379768461e-20], [-6.8079366979903532e-4, -4.8263668232223274e-4, -2.4155202619594688e-4, -8.4610245331453698e-5, -2.0458674843481866e-5, -3.3474207101448765e-6, -3.6042166364614139e-7, -2.4568700371396641e-8, -1.0042840159559724e-9, -2.2760763558200834e-11, -2.5389407033077878e-13, -1.1455591574770048e-15, -1.4418216504944787e-18, -1.9972417261343264e-22], [7.2794984387754695e-6, 5.1692821165479449e-6, 2.5959474634196985e-6, 9.1409769581806713e-7, 2.2265664631454551e-7, 3.6787912629548869e-8, 4.0114807100907245e-9, 2.7794419256513629e-10, 1.1603495501316269e-11, 2.7036182952026151e-13, 3.1309867744559823e-15, 1.4900801451256417e-17, 2.0382077650810512e-20, 3.3087945262909511e-24], [-8.4268499267140132e-8, -6.1117834034352150e-8, -3.1997300674596052e-8, -1.1975976706725889e-8, -3.1569292649273199e-9, -5.7388704852226439e-10, -6.9914121994879166e-11, -5.4912752683968472e-12, -2.6367479459715157e-13, -7.1775399150513177e-15, -9.8924520040184642e-17, -5.7433205729321338e-19, -9.9610706617883366e-22, -2.2187067244572571e-25], [8.0032296725763683e-10, 7.1842118001207727e-10, 5.1416416116481317e-10, 2.6447262438404005e-10, 9.2679869344700224e-11, 2.1486781185835522e-11, 3.2113458173905157e-12, 2.9937350871844187e-13, 1.6606359817541924e-14, 5.1107646643782246e-16, 7.8329635201142689e-18, 4.9985630436660311e-20, 9.4779508483367940e-23, 2.3283961392556913e-26], [9.2918801611088628e-12, -5.6936074092709002e-12, -1.5429452328010280e-11, -1.2278739419776019e-11, -5.3142571185852911e-12, -1.3869730135741971e-12, -2.2307272814762552e-13, -2.1844451328351229e-14, -1.2554994384720430e-15, -3.9722451187762783e-17, -6.2336689909148044e-19, -4.0703214321587624e-21, -7.9288545297483572e-24, -2.0368893874800841e-27], [-1.2296691927398704e-12, -1.2688389831080933e-13, 7.0033316013318817e-13, 6.6348463350063102e-13, 3.0349082992891746e-13, 8.1340091838486447e-14, 1.3295080776673742e-14, 1.3173960950812946e-15, 7.6495419413303733e-17, 2.4453670858169548e-18, 3.8839283203943417e-20, 2.5770267774467085e-22, 5.1481806345810162e-25, 1.3943525399178838e-28], [5.8416469729155219e-14, 9.4069160977415644e-15, -2.8177679786291143e-14, -2.7934094398027272e-14, -1.2964521421482905e-14, -3.5057113539034587e-15, -5.7745627029173922e-16, -5.7690567979045803e-17, -3.3825534632804342e-18, -1.0947867540571900e-19, -1.7682653325318127e-21, -1.2024315725078575e-23, -2.5012910625082792e-26, -7.3778240330059667e-30], [-1.4024644486880682e-15, -2.4514856649699432e-16, 6.5183337358750578e-16, 6.5831716603762136e-16, 3.0928019754157683e-16, 8.4755613802716409e-17, 1.4189472035554319e-17, 1.4467404751035512e-18, 8.7053428395967083e-20, 2.9139908092763101e-21, 4.9235020368921755e-23, 3.5670955789522455e-25, 8.1791434200249098e-28, 2.8915270226705630e-31], [-2.5859620123085462e-17, -4.4843776255612697e-18, 1.1584498080071263e-17, 1.1277941383496570e-17, 5.0205895339583619e-18, 1.2755980600431174e-18, 1.9206946598341680e-19, 1.6812328630587856e-20, 8.0094398638346920e-22, 1.7814855647733331e-23, 1.0296950978022808e-25, -1.1978115864615601e-27, -9.2449018164020869e-30, -7.2350201985433689e-33], [4.3236568421379001e-18, 7.7107253554005790e-19, -1.9520831618603530e-18, -1.9500000423928758e-18, -8.9774682707777990e-19, -2.3915195198893022e-19, -3.8549447069972093e-20, -3.7373731303029672e-21, -2.1013318678444571e-22, -6.4005828997108541e-24, -9.4097247235667129e-26, -5.4220506374354058e-28, -7.6640763977191500e-31, 3.6332863650320341e-35], [-2.0803219480860855e-19, -3.7423788573180918e-20, 9.3793768968727269e-20, 9.4136683654164381e-20, 4.3563698949664619e-20, 1.1683507161514327e-20, 1.9002318297347938e-21, 1.8645995597591500e-22, 1.0659054767964314e-23, 3.3250529563166608e-25, 5.0719445602695841e-27, 3.1202679414946261e-29, 5.1812707372878760e-32, 4.2710070468961296e-36], [3.9466590193583079e-21, 7.1637730756808940e-22, -1.7752923235414264e-21, -1.7891932266397071e-21, -8.3142160255647940e-22, -2.2412482071072907e-22, -3.6686109272176165e-23, -3.6285525858041102e-24, -2.0946516065543232e-25, -6.6115357058061083e-27, -1.0219428652966683e-28, -6.3517176937001541e-31, -1.0242697090316308e-33, 4.5602269364012354e-38], [1.6015270848226059e-22, 2.8814378299392816e-23, -7.2229311657566258e-23, -7.2528141416449411e-23, -3.3593693271683123e-23, -9.0241338855892706e-24, -1.4719525073766583e-24, -1.4518863527184589e-25, -8.3795569861113544e-27, -2.6624454802659645e-28, -4.2188786009411653e-30, -2.8400459933868788e-32, -6.1907577789394880e-35, -2.7638443359118744e-38]],
        [[4.6343196235474900e-2, 3.2851593342704759e-2, 1.6439046092702371e-2, 5.7567821015087540e-3, 1.3914936358051078e-3, 2.2756687025532048e-4, 2.4487301201612194e-5, 1.6678682647692381e-6, 6.8104439358692110e-8, 1.5413013671805363e-9, 1.7159034543520293e-11, 7.7193963793878715e-14, 9.6686808291033050e-17, 1.3256280781547949e-20], [-6.2637879697343007e-4, -4.4403002203864587e-4, -2.2219913859228063e-4, -7.7814558711527304e-5, -1.8809781125193829e-5, -3.0763815878158126e-6, -3.3106214619014248e-7, -2.2551683992454786e-8, -9.2099279816448856e-10, -2.0847456710525679e-11, -2.3215344745547183e-13, -1.0448073026617372e-15, -1.3094725174656983e-18, -1.7976767684187133e-22], [6.3473396419466515e-6, 4.5007481044661250e-6, 2.2534862292343369e-6, 7.8985287031652625e-7, 1.9115747759702447e-7, 3.1314464954658724e-8, 3.3769530916316868e-9, 2.3066240865497274e-10, 9.4536343467750239e-12, 2.1500650880438263e-13, 2.4099284023297441e-15, 1.0949432936136062e-17, 1.3935272619141336e-20, 1.9732040807520024e-24], [-7.1117585106922809e-8, -5.0626292744401665e-8, -2.5550976387520813e-8, -9.0660333094723240e-9, -2.2315375618895121e-9, -3.7374077185025560e-10, -4.1456542255307749e-11, -2.9338614231215984e-12, -1.2571409026160321e-13, -3.0247244537896269e-15, -3.6457632680892713e-17, -1.8256198444656568e-19, -2.6710850122115274e-22, -4.7749589674804185e-26], [7.9678984206061708e-10, 5.9077236558589588e-10, 3.2215515770233997e-10, 1.2726838538558702e-10, 3.5671469494738178e-11, 6.9102749582632476e-12, 8.9573930513232432e-13, 7.4564614100591921e-14, 3.7747828453818344e-15, 1.0769969198028382e-16, 1.5462572233058043e-18, 9.2900777375139385e-21, 1.6539184420295193e-23, 3.7230568112864351e-27], [-5.7038454996830042e-12, -6.4679944932231324e-12, -5.7171387270244061e-12, -3.3546118875419463e-12, -1.2708471189529259e-12, -3.0889198995340843e-13, -4.7556038557630389e-14, -4.5184960674489145e-15, -2.5369396346699351e-16, -7.8634135787466043e-18, -1.2087007553258333e-19, -7.7010305371150518e-22, -1.4478787773558473e-24, -3.4644577957230215e-28], [-2.0934265899427216e-13, 2.9576245490664020e-14, 1.9699326073671549e-13, 1.6843832240217419e-13, 7.4592927130631455e-14, 1.9658553017386032e-14, 3.1753470688241990e-15, 3.1135876289209741e-16, 1.7881621861523560e-17, 5.6423450519391134e-19, 8.8102105393590729e-21, 5.7031869894006703e-23, 1.0934287186290303e-25, 2.7049422936297436e-29], [1.7916509224684687e-14, 2.3990472221455435e-15, -9.3544093258300688e-15, -9.0459702726457661e-15, -4.1564316820844719e-15, -1.1147693957383207e-15, -1.8201296356491306e-16, -1.7992263659074985e-17, -1.0408166670250744e-18, -3.3090142139509231e-20, -5.2132993594652905e-22, -3.4157440505556594e-24, -6.6740216091569500e-27, -1.7165140300475465e-30], [-8.4953504769148414e-16, -1.4383569995746961e-16, 3.9829989462243247e-16, 3.9715467547239620e-16, 1.8425778412661731e-16, 4.9712598216071408e-17, 8.1589644073855085e-18, 8.1099134203701220e-19, 4.7223057505959396e-20, 1.5139522941261043e-21, 2.4124301548077456e-23, 1.6070555752545044e-25, 3.2267778323590784e-28, 8.7862332575406696e-32], [2.6681375208908081e-17, 4.7637803478458899e-18, -1.2173128331968000e-17, -1.2276206994401905e-17, -5.7307089141508338e-18, -1.5558357627254863e-18, -2.5725459486454872e-19, -2.5810014338690924e-20, -1.5209823695021163e-21, -4.9538720238409702e-23, -8.0666098255308132e-25, -5.5453324823489511e-27, -1.1711845348531053e-29, -3.5274674985506075e-33], [-3.0564641651793793e-19, -5.7638732338831719e-20, 1.3750259562567106e-19, 1.4229449351414983e-19, 6.8142906253714351e-20, 1.9085741672143456e-20, 3.2797732426348330e-21, 3.4504930451133299e-22, 2.1556701302945573e-23, 7.5477394818236901e-25, 1.3462124555636835e-26, 1.0417525825694115e-28, 2.5915484095491540e-31, 1.0131336504862261e-34], [-2.4590589087934340e-20, -4.3116594052427908e-21, 1.1148879836750023e-20, 1.1050066595187146e-20, 5.0457064289389265e-21, 1.3298006468248568e-21, 2.1127376358267299e-22, 2.0077910872719953e-23, 1.0970873562468170e-24, 3.1998233031989496e-26, 4.3719292791655385e-28, 2.1618200574652142e-30, 1.6613539841689586e-33, -1.3126672133747465e-36], [1.9648439594938130e-21, 3.5187033154233170e-22, -8.8704685330122273e-22, -8.8855958703522451e-22, -4.1041620546483693e-22, -1.0980934688529641e-22, -1.7805301264114627e-23, -1.7403126468696706e-24, -9.8983417878440293e-26, -3.0674661726614281e-27, -4.6389406924206850e-29, -2.8236042774089039e-31, -4.6611173344711581e-34, -5.2727850337109955e-38], [-7.6800765442138467e-23, -1.3884950848141247e-23, 3.4589031656812370e-23, 3.4802293498982026e-23, 1.6148230904106214e-23, 4.3457796536301832e-24, 7.1005059544750368e-25, 7.0105957715575998e-26, 4.0421795352820141e-27, 1.2767597738181606e-28, 1.9860294597655968e-30, 1.2658570490269673e-32, 2.2935645332051594e-35, 3.9533861435435338e-39]],
        [[4.5138661445663487e-2, 3.1997722639807410e-2, 1.6011761728018829e-2, 5.6071490628132747e-3, 1.3553244131669573e-3, 2.2165151727312570e-4, 2.3850754294612163e-5, 1.6245097483211456e-6, 6.6333847913743207e-8, 1.5012266220541284e-9, 1.6712832610457002e-11, 7.5186246240193894e-14, 9.4171353040525185e-17, 1.2911190347112446e-20], [-5.7880678191504030e-4, -4.1030290812251099e-4, -2.0531744397907733e-4, -7.1900299622702388e-5, -1.7379387737316200e-5, -2.8422704580576552e-6, -3.0584497238980595e-7, -2.0831829654156484e-8, -8.5064413836864337e-10, -1.9251699456304664e-11, -2.1433182454669480e-13, -9.6426157636137604e-16, -1.2078326922115395e-18, -1.6562115250090223e-22], [5.5661272845240527e-6, 3.9458466985684969e-6, 1.9746689048158371e-6, 6.9159215522900640e-7, 1.6719569367845349e-7, 2.7349603255608886e-8, 2.9438173613125591e-9, 2.0058451574682995e-10, 8.1945844857116803e-12, 1.8557746043328769e-13, 2.0678656976284542e-15, 9.3149313177239196e-18, 1.1691442391875364e-20, 1.6095614090206837e-24], [-5.9428964041988167e-8, -4.2154935873548657e-8, -2.1122196682181469e-8, -7.4118441162668922e-9, -1.7966475927884231e-9, -2.9494042977352519e-10, -3.1893589294356575e-11, -2.1861643523607196e-12, -9.0006427408415798e-14, -2.0592059184933859e-15, -2.3265341634967280e-17, -1.0689658115160505e-19, -1.3839848241697436e-22, -2.0218497038570211e-26], [6.6058899144526177e-10, 4.7186114251377597e-10, 2.3978340823363720e-10, 8.5961693642868288e-11, 2.1453153594079830e-11, 3.6560415679041646e-12, 4.1417790064697339e-13, 3.0050414529323031e-14, 1.3254622662493767e-15, 3.2970754875984873e-17, 4.1282845400260659e-19, 2.1591824257513433e-21, 3.3206731061056903e-24, 6.2839855843399774e-28], [-7.0059026265918871e-12, -5.3346538854164198e-12, -3.0459046584895553e-12, -1.2715244583305794e-12, -3.7684121295229606e-13, -7.6842109708365193e-14, -1.0413772561311680e-14, -8.9979884107782921e-16, -4.6960700986355835e-17, -1.3728318967866267e-18, -2.0081822357911413e-20, -1.2224487954755806e-22, -2.1899231651866306e-25, -4.8935460601915025e-29], [3.3080624864141641e-14, 5.3848623642562647e-14, 5.8026932074404528e-14, 3.7250725799462521e-14, 1.4753598995633718e-14, 3.6734475658026531e-15, 5.7341784887308209e-16, 5.4919112557297536e-17, 3.0964943335689026e-18, 9.6109770869658316e-20, 1.4754224939697845e-21, 9.3576711717260972e-24, 1.7416557005903000e-26, 4.0653679403319188e-30], [2.7994690402007794e-15, -6.5944849306597815e-17, -2.1306300955200501e-15, -1.8898451559247222e-15, -8.4576148907699165e-16, -2.2376240114083531e-16, -3.6182739384044670e-17, -3.5459320407735396e-18, -2.0326328906196840e-19, -6.3926580924985096e-21, -9.9302424423342185e-23, -6.3755538676034313e-25, -1.2049143994837036e-27, -2.8866595675453646e-31], [-2.0197916556026873e-16, -2.9612752386694386e-17, 1.0144463255008106e-16, 9.8993860422028099e-17, 4.5551359281854156e-17, 1.2211171476199530e-17, 1.9907096024604100e-18, 1.9630261524032625e-19, 1.1316006661061741e-20, 3.5799909643823608e-22, 5.6004784917634451e-24, 3.6300131731904598e-26, 6.9623596877639739e-29, 1.7179785738891347e-32], [9.5187892396581324e-18, 1.6413866344873074e-18, -4.4113108537154384e-18, -4.4061495443105562e-18, -2.0422464901091998e-18, -5.4990308872816885e-19, -8.9992590787322054e-20, -8.9103633371651667e-21, -5.1612898133145862e-22, -1.6428908272827887e-23, -2.5914613955994541e-25, -1.6999841382704598e-27, -3.3249054007964879e-30, -8.5402385562160369e-34], [-3.3674337595582803e-19, -6.0333192052358382e-20, 1.5289220700932480e-19, 1.5392848967503720e-19, 7.1627270452616282e-20, 1.9360046529587256e-20, 3.1823867122963716e-21, 3.1683749635267355e-22, 1.8483101315263155e-23, 5.9387278886210886e-25, 9.4891354664106603e-27, 6.3431947240877301e-29, 1.2791287922067244e-31, 3.4951118487755915e-35], [7.8751674931639665e-21, 1.4415276699044682e-21, -3.5452118927961412e-21, -3.5961839333997887e-21, -1.6842384567408106e-21, -4.5877591868442538e-22, -7.6153921218459167e-23, -7.6768584527661630e-24, -4.5507421629716462e-25, -1.4932141613243512e-26, -2.4545743771522273e-28, -1.7082857903228070e-30, -3.6672570475787410e-33, -1.1268394383654274e-36], [-1.5763282003147790e-23, -4.0556127293977344e-24, 6.4010968882427709e-24, 7.9190219538635967e-24, 4.3881885535281798e-24, 1.4265501103612882e-24, 2.8554276061691526e-25, 3.5032487079036442e-26, 2.5502877969927704e-27, 1.0384395352860855e-28, 2.1486621867754341e-30, 1.9241704978603862e-32, 5.5249152140157264e-35, 2.4737913531897063e-38], [-9.5799231704354788e-24, -1.6905857671776108e-24, 4.3416793034366892e-24, 4.3203871023966614e-24, 1.9820418534480500e-24, 5.2568564500625976e-25, 8.4252135641129274e-26, 8.1062561881439949e-27, 4.5107799084552642e-28, 1.3540748732484222e-29, 1.9477771802482453e-31, 1.0825768371128884e-33, 1.4192170652961524e-36, -8.8818016778614413e-41]],
        [[4.4023438644899279e-2, 3.1207167243552073e-2, 1.5616164795256577e-2, 5.4686149380235251e-3, 1.3218387320938672e-3, 2.1617520509001862e-4, 2.3261474285496678e-5, 1.5843727743267349e-6, 6.4694915578432539e-8, 1.4641349209910695e-9, 1.6299892652223968e-11, 7.3328508601610695e-14, 9.1844445001509371e-17, 1.2592143327897576e-20], [-5.3696095182645787e-4, -3.8063888664161218e-4, -1.9047295458267279e-4, -6.6701635017166822e-5, -1.6122704262677011e-5, -2.6367300310406838e-6, -2.8372493466047177e-7, -1.9324944750327309e-8, -7.8909963973471482e-10, -1.7858453668327231e-11, -1.9881489977098893e-13, -8.9441500352062935e-16, -1.1202689403225389e-18, -1.5359428928308030e-22], [4.9119605336998141e-6, 3.4819876099118155e-6, 1.7424136517628184e-6, 6.1018346918337667e-7, 1.4749260461269481e-7, 2.4121771432930792e-8, 2.5957063917349338e-9, 1.7680521619795215e-10, 7.2199296571549248e-12, 1.6340938600457162e-13, 1.8193889959599197e-15, 8.1861159703764477e-18, 1.0255541422944990e-20, 1.4066876623408813e-24], [-4.9920566905142651e-8, -3.5390478980241462e-8, -1.7712545965589339e-8, -6.2043950503734097e-9, -1.5002443027902879e-9, -2.4547329802471445e-10, -2.6431094165304413e-11, -1.8017573287950401e-12, -7.3650817511095855e-14, -1.6691929745799244e-15, -1.8618765340849864e-17, -8.3993158426406726e-20, -1.0566217697341453e-22, -1.4608691586199224e-26], [5.3204142327889806e-10, 3.7756918100594131e-10, 1.8936315449980270e-10, 6.6544536928176668e-11, 1.6163035310085214e-11, 2.6603966755522023e-12, 2.8866579098353943e-13, 1.9872602498769884e-14, 8.2268500308715109e-16, 1.8954971991769867e-17, 2.1614519224407509e-19, 1.0056666340653114e-21, 1.3259699703091100e-24, 1.9965382884807386e-28], [-5.7621919679224131e-12, -4.1306940514404670e-12, -2.1139952086396865e-12, -7.6583204873674037e-13, -1.9375409977043431e-13, -3.3572931104242162e-14, -3.8775267074227361e-15, -2.8750971555871187e-16, -1.2987132513336958e-17, -3.3142535267159935e-19, -4.2632993915689589e-21, -2.2928986830449087e-23, -3.6261626943879052e-26, -7.0344369590491586e-30], [5.7616430507645455e-14, 4.4964078905772543e-14, 2.6709717042992742e-14, 1.1642633395726355e-14, 3.5896933029789660e-15, 7.5653074546926350e-16, 1.0524834628156679e-16, 9.2795601605467618e-18, 4.9170922408133173e-19, 1.4532585534524627e-20, 2.1410671003027778e-22, 1.3075452496801649e-24, 2.3376057203261204e-27, 5.1548039188087292e-31], [-1.6140714683056762e-16, -4.2114950301305401e-16, -5.2418683032097480e-16, -3.5413902823229395e-16, -1.4344696087193627e-16, -3.6118485932599992e-17, -5.6708371575908516e-18, -5.4461556243314286e-19, -3.0727294635207031e-20, -9.5268941457050952e-22, -1.4582075652052233e-23, -9.1975492480589988e-26, -1.6945427317860056e-28, -3.8677067756919859e-32], [-2.7844962099402202e-17, -5.2025430960080671e-19, 1.9388153045473523e-17, 1.7491186722131270e-17, 7.8615650053630416e-18, 2.0822090518195023e-18, 3.3657416267441741e-19, 3.2939673531687202e-20, 1.8838649225151536e-21, 5.9045577667329306e-23, 9.1262061531357795e-25, 5.8147735231918294e-27, 1.0848916553949406e-29, 2.5288273329728744e-33], [1.8288592479941920e-18, 2.7765661034210105e-19, -9.0326001137148028e-19, -8.8453230364877256e-19, -4.0702807886025057e-19, -1.0900720037766629e-19, -1.7741095062871940e-20, -1.7452952883637855e-21, -1.0028380366710480e-22, -3.1585945368306599e-24, -4.9103896447380175e-26, -3.1529276458404543e-28, -5.9525362492618262e-31, -1.4198034508679981e-34], [-8.4979244961645320e-20, -1.4743253730951020e-20, 3.9200590534328726e-20, 3.9155933158892155e-20, 1.8128027834578582e-20, 4.8725561639176260e-21, 7.9546902114814463e-22, 7.8507636299017608e-23, 4.5280696926114108e-24, 1.4329810880776199e-25, 2.2419524719284783e-27, 1.4527814035742856e-29, 2.7833729115808635e-32, 6.8377372301155554e-36], [3.1669272963578110e-21, 5.6695560436698842e-22, -1.4360579279586465e-21, -1.4435051123532719e-21, -6.7025348664241541e-22, -1.8063996297922107e-22, -2.9581216094340818e-23, -2.9305549865726304e-24, -1.6984513938148210e-25, -5.4094346152074796e-27, -8.5376847162363470e-29, -5.6034315110420286e-31, -1.0959031140940436e-33, -2.8059070434573637e-37], [-9.1521590959999385e-23, -1.6613654675536656e-23, 4.1243844785622495e-23, 4.1634699088752302e-23, 1.9396117105647774e-23, 5.2477747892597041e-24, 8.6355798825352406e-25, 8.6084602323838336e-26, 5.0295182734316351e-27, 1.6190196457956910e-28, 2.5928150716692434e-30, 1.7379603187550883e-32, 3.5150828263701515e-35, 9.6098948585374830e-39], [1.6779295434200796e-24, 3.1066083413382277e-25, -7.5155052428702340e-25, -7.6522461808792160e-25, -3.5944927418296963e-25, -9.8247516583293980e-26, -1.6376711576430027e-26, -1.6593746136813275e-27, -9.8987082047481927e-29, -3.2733034607829288e-30, -5.4325787455433010e-32, -3.8261440050081141e-34, -8.3340599027988095e-37, -2.5979794212146092e-40]],
        [[4.2987012121870353e-2, 3.0472469115168075e-2, 1.5248519487901912e-2, 5.3398694319783736e-3, 1.2907191802598065e-3, 2.1108587161857086e-4, 2.2713837663191286e-5, 1.5470724250335066e-6, 6.3171823913203311e-8, 1.4296652238850592e-9, 1.5916148511728705e-11, 7.1602150920701264e-14, 8.9682163431800009e-17, 1.2295686342800131e-20], [-4.9992502276492541e-4, -3.5438494738698562e-4, -1.7733534850606608e-4, -6.2100956698565242e-5, -1.5010648082397330e-5, -2.4548608565392768e-6, -2.6415466105661732e-7, -1.7991959508335957e-8, -7.3466831820217711e-10, -1.6626557863969002e-11, -1.8509986887033070e-13, -8.3271115949304801e-16, -1.0429768786656436e-18, -1.4299534868992993e-22], [4.3604227948845736e-6, 3.0910013301795867e-6, 1.5467482847817640e-6, 5.4165561341434118e-7, 1.3092581189022098e-7, 2.1411834364968054e-8, 2.3040228333873228e-9, 1.5693105793159955e-10, 6.4080257605200579e-12, 1.4502355907084229e-13, 1.6145322798247359e-15, 7.2634214302341250e-18, 9.0976904503252749e-21, 1.2473727187243688e-24], [-4.2257477242664705e-8, -2.9955606787015784e-8, -1.4990173207006569e-8, -5.2495583340629378e-9, -1.2689434090277720e-9, -2.0753629273249899e-10, -2.2333514427306494e-11, -1.5213108549540968e-12, -6.2127435056360083e-14, -1.4062531272470001e-15, -1.5658873595914459e-17, -7.0466247149546570e-20, -8.8301199490516461e-23, -1.2117087335729259e-26], [4.2992989221591729e-10, 3.0480938932400302e-10, 1.5257075327620659e-10, 5.3452078578966568e-11, 1.2928002765982400e-11, 2.1159819086811924e-12, 2.2793009853328711e-13, 1.5545766671667526e-14, 6.3589908258582098e-16, 1.4424515457695824e-17, 1.6108654812268597e-19, 7.2789924347876896e-22, 9.1798865041194940e-25, 1.2749402301673221e-28], [-4.4914354069099961e-12, -3.1887945392500692e-12, -1.6007056938785943e-12, -5.6327631626297161e-13, -1.3707252806807599e-13, -2.2617503802339830e-14, -2.4618150780403662e-15, -1.7014648448286587e-16, -7.0784183493378662e-18, -1.6409897405017195e-19, -1.8859965653566500e-21, -8.8656155365057602e-24, -1.1854627555535595e-26, -1.8228285319207507e-30], [4.7095095301156591e-14, 3.3853498629928108e-14, 1.7418966544998756e-14, 6.3598183382710779e-15, 1.6251145340635430e-15, 2.8491914322201175e-16, 3.3342333024383413e-17, 2.5074715807236968e-18, 1.1494565749313517e-19, 2.9773344425455493e-21, 3.8860385533960795e-23, 2.1185415418736072e-25, 3.3886385923481411e-28, 6.6085111079145100e-32], [-4.4745441653309259e-16, -3.5465074220575724e-16, -2.1571404801860544e-16, -9.6321570845082561e-17, -3.0313613240931680e-17, -6.4914979177905206e-18, -9.1385415335589413e-19, -8.1255344894197999e-20, -4.3299948671053673e-21, -1.2839230274054845e-22, -1.8934181694809527e-24, -1.1543530155969833e-26, -2.0519365424088772e-29, -4.4573409884244506e-33], [8.3495454604712639e-19, 3.1426915801010397e-18, 4.1778423369841145e-18, 2.8795013753071393e-18, 1.1757396197932737e-18, 2.9707281651959587e-19, 4.6701620928267805e-20, 4.4846545696312530e-21, 2.5272287793429401e-22, 7.8176375825069189e-24, 1.1921976901808320e-25, 7.4764077238912384e-28, 1.3641213015511900e-30, 3.0517801176212931e-34], [2.2035841232935210e-19, 6.6445081342811537e-21, -1.4949406071967954e-19, -1.3550046981471485e-19, -6.0943428668692887e-20, -1.6133837430137338e-20, -2.6049294668387083e-21, -2.5449149983054843e-22, -1.4519150110036811e-23, -4.5354090254145211e-25, -6.9769281672254441e-27, -4.4143153820505645e-29, -8.1419494797029218e-32, -1.8536523269552498e-35], [-1.3653020937956051e-20, -2.0891925515496703e-21, 6.7128623570756453e-21, 6.5757582072913389e-21, 3.0237161613656784e-21, 8.0880241622238296e-22, 1.3141170416099782e-22, 1.2898717060175449e-23, 7.3894937592853430e-25, 2.3181182612696464e-26, 3.5836871741805734e-28, 2.2821166730778449e-30, 4.2502741327150842e-33, 9.8557655606694032e-37], [6.2204902160356567e-22, 1.0793920550206993e-22, -2.8663957124328637e-22, -2.8608702228912916e-22, -1.3229206679254288e-22, -3.5500909215626689e-23, -5.7834057247015122e-24, -5.6920183545364413e-25, -3.2709863148504650e-26, -1.0300770818413858e-27, -1.6005736525866648e-29, -1.0266652263302580e-31, -1.9341311538207830e-34, -4.5869251762059154e-38], [-2.3617885487448528e-23, -4.2184729364993954e-24, 1.0710312128412890e-23, 1.0749922218492322e-23, 4.9829711897786319e-24, 1.3400104380710132e-24, 2.1881102502635774e-25, 2.1596695736733032e-26, 1.2455632701840121e-27, 3.9410262564934093e-29, 6.1633281846704116e-31, 3.9904390058873408e-33, 7.6306208493458506e-36, 1.8637968074138833e-39], [7.4505521967845708e-25, 1.3454859494575966e-25, -3.3610130602606142e-25, -3.3837891121850632e-25, -1.5719337812647461e-25, -4.2377356191968878e-26, -6.9412285400467721e-27, -6.8779997974054365e-28, -3.9870399940137071e-29, -1.2700410382176517e-30, -2.0045963806128041e-32, -1.3153086139505123e-34, -2.5692859982171406e-37, -6.5429082245158285e-41]],
        [[4.2020517959361831e-2, 2.9787344417123694e-2, 1.4905680927549033e-2, 5.2198110101893611e-3, 1.2616994235123098e-3, 2.0633994317620227e-4, 2.2203153303211622e-5, 1.5122889705410340e-6, 6.1751506158981445e-8, 1.3975214772034541e-9, 1.5558299200755760e-11, 6.9992290014960623e-14, 8.7665801505091819e-17, 1.2019237090098935e-20], [-4.6695950706627847e-4, -3.3101647381354909e-4, -1.6564168606419472e-4, -5.8005957874173661e-5, -1.4020830228682232e-5, -2.2929845882076575e-6, -2.4673598341663598e-7, -1.6805545843613622e-8, -6.8622320430999108e-10, -1.5530174800692928e-11, -1.7289402446492946e-13, -7.7780025857843431e-16, -9.7419996987225634e-19, -1.3356567060822269e-22], [3.8918295579095878e-6, 2.7588254074325328e-6, 1.3805250439383649e-6, 4.8344526241214958e-7, 1.1685532790236559e-7, 1.9110675226637361e-8, 2.0563996786231766e-9, 1.4006442398769401e-10, 5.7192732641211503e-12, 1.2943510885979394e-13, 1.4409739706707103e-15, 6.4825339521176628e-18, 8.1194327027851350e-21, 1.1132019993465763e-24], [-3.6039956737662846e-8, -2.5547891918115417e-8, -1.2784270944506061e-8, -4.4769295420227666e-9, -1.0821394878401953e-9, -1.7697548589722646e-10, -1.9043538887306072e-11, -1.2970952873106780e-12, -5.2965115581701878e-14, -1.1986923717717893e-15, -1.3345062013316177e-17, -6.0037367691800316e-20, -7.5200623433327124e-23, -1.0311082787952554e-26], [3.5042554975117206e-10, 2.4841214197575881e-10, 1.2431010738595467e-10, 4.3534185935911259e-11, 1.0523516202241658e-11, 1.7211835364307612e-12, 1.8522898292072880e-13, 1.2618095980827752e-14, 5.1533549351947611e-16, 1.1665681206005984e-17, 1.2991532569499134e-19, 5.8472974689990423e-22, 7.3291292476822864e-25, 1.0061967462336338e-28], [-3.5038905323199830e-12, -2.4842881564809282e-12, -1.2436183160160397e-12, -4.3575818370198895e-13, -1.0541511845624362e-13, -1.7258496369072179e-14, -1.8597158857678083e-15, -1.2689754137170895e-16, -5.1937302706044866e-18, -1.1790029961230881e-19, -1.3179478653579233e-21, -5.9633958087022728e-24, -7.5355997874730036e-27, -1.0500980987271635e-30], [3.5613768612787940e-14, 2.5292108237698100e-14, 1.2703527810750853e-14, 4.4742823684383208e-15, 1.0901485218059540e-15, 1.8016545467916474e-16, 1.9649504150175943e-17, 1.3614227637717347e-18, 5.6809600104471224e-20, 1.3219054978443341e-21, 1.5262032178207751e-23, 7.2149617330966917e-26, 9.7163333727577267e-29, 1.5074756930740989e-32], [-3.6102107652896340e-16, -2.5982952935764734e-16, -1.3400863114801640e-16, -4.9093022582922010e-17, -1.2597464204757009e-17, -2.2192670322412162e-18, -2.6105607141253605e-19, -1.9736775785347474e-20, -9.0943896462641465e-22, -2.3667958276209761e-23, -3.1012886103057566e-25, -1.6950004117045887e-27, -2.7109686114435892e-30, -5.2527316430613731e-34], [3.3039966781189003e-18, 2.6253060736591090e-18, 1.6026900342504848e-18, 7.1813606928628037e-19, 2.2660694935501466e-19, 4.8608947611891122e-20, 6.8484686896350120e-21, 6.0891280229057326e-22, 3.2420844395103034e-23, 9.5966416514278469e-25, 1.4111456746718565e-26, 8.5637463940564359e-29, 1.5105568639282933e-31, 3.2309196093784445e-35], [-6.6590419780567155e-21, -2.2545957071122690e-20, -2.9478666886843911e-20, -2.0208062925862670e-20, -8.2281484567960984e-21, -2.0747586351889736e-21, -3.2554697141421800e-22, -3.1197603808943416e-23, -1.7538141786047798e-24, -5.4086327204049435e-26, -8.2147175578627207e-28, -5.1217640825749152e-30, -9.2597790816174576e-33, -2.0348229544152010e-36], [-1.4305478342843219e-21, -3.0593183895932495e-23, 9.8903607600322205e-22, 8.9229701672267479e-22, 4.0052261007356531e-22, 1.0586152239392947e-22, 1.7063123996397643e-23, 1.6636569928408691e-24, 9.4676355131591056e-26, 2.9477996930184761e-27, 4.5145759461558038e-29, 2.8381050919515059e-31, 5.1812163681462881e-34, 1.1557932644063385e-37], [8.5711523953171636e-23, 1.2969831297055617e-23, -4.2333766531495049e-23, -4.1384714832911432e-23, -1.9005508026445501e-23, -5.0767095347820910e-24, -8.2346344461089701e-25, -8.0655441837537740e-26, -4.6079532173089915e-27, -1.4402768773654942e-28, -2.2154535111323759e-30, -1.4005318666904290e-32, -2.5777284379993728e-35, -5.8369813305811655e-39], [-3.8194700488670022e-24, -6.6026333607622067e-25, 1.7622906596642588e-24, 1.7565544470268428e-24, 8.1127967535025536e-25, 2.1738523892129003e-25, 3.5346751928931329e-26, 3.4703116780560478e-27, 1.9878881193394973e-28, 6.2334664969787081e-30, 9.6288100594993215e-32, 6.1230282043475599e-34, 1.1373801246045272e-36, 2.6212739236719025e-40], [1.4498414003808897e-25, 2.5814367309410114e-26, -6.5802367544548695e-26, -6.5950953369917589e-26, -3.0526485297878804e-26, -8.1941867268363188e-27, -1.3349043736436423e-27, -1.3135639074235439e-28, -7.5458131763747358e-30, -2.3748943020414486e-31, -3.6868430209736510e-33, -2.3613411756834021e-35, -4.4362593999733872e-38, -1.0450952284182593e-41]],
        [[4.1116428014284921e-2, 2.9146456586602948e-2, 1.4584978639066286e-2, 5.1075044777107148e-3, 1.2345534047508547e-3, 2.0190044841102378e-4, 2.1725442678045845e-5, 1.4797514069187229e-6, 6.0422895283245615e-8, 1.3674531863243573e-9, 1.5223555528572546e-11, 6.8486374988481555e-14, 8.5779633029910671e-17, 1.1760637879563360e-20], [-4.3746451317951398e-4, -3.1010817472688282e-4, -1.5517910699170302e-4, -5.4342073695277845e-5, -1.3135219444811594e-5, -2.1481506487783274e-6, -2.3115116476845537e-7, -1.5744041061015219e-8, -6.4287862206918481e-10, -1.4549227033679651e-11, -1.6197334454151314e-13, -7.2867125046118764e-16, -9.1266551538480487e-19, -1.2512910502977967e-22], [3.4908199093394774e-6, 2.4745591053717709e-6, 1.2382771766052551e-6, 4.3363150921979585e-7, 1.0481464427249188e-7, 1.7141521832387714e-8, 1.8445088329888283e-9, 1.2563217603641390e-10, 5.1299563774290746e-12, 1.1609797214333557e-13, 1.2924932888400811e-15, 5.8145542707483042e-18, 7.2827684956093397e-21, 9.9848909528370508e-25], [-3.0950557634252217e-8, -2.1940115151016757e-8, -1.0978904698705553e-8, -3.8446968007557917e-9, -9.2931595228989919e-10, -1.5198160256801626e-10, -1.6353949854345417e-11, -1.1138921966268662e-12, -4.5483765221869536e-14, -1.0293616056012456e-15, -1.1459678128295919e-17, -5.1553915282793999e-20, -6.4571874072830436e-23, -8.8530553398419185e-27], [2.8813606483131515e-10, 2.0425310518848955e-10, 1.0220921384983119e-10, 3.5792751780927204e-11, 8.6516534193286545e-12, 1.4149150164522254e-12, 1.5225328449857090e-13, 1.0370343799064193e-14, 4.2346164956954659e-16, 9.5837535157424206e-18, 1.0669730114926450e-19, 4.8002218317633763e-22, 6.0127239595413268e-25, 8.2446426049416091e-29], [-2.7589962858450929e-12, -1.9558259536006287e-12, -9.7874140492040433e-13, -3.4276646680245199e-13, -8.2858608587958580e-14, -1.3552382237364748e-14, -1.4585202031641109e-15, -9.9361122857077296e-17, -4.0582343179664207e-18, -9.1873143750798713e-20, -1.0232463550570794e-21, -4.6060813787744529e-24, -5.7744664143269640e-27, -7.9301886306998183e-31], [2.6901212816388880e-14, 1.9073706558978585e-14, 9.5486987074509071e-15, 3.3461044045294105e-15, 8.0955768895559991e-16, 1.3256067950789760e-16, 1.4287087531615314e-17, 9.7511943461050885e-19, 3.9922618625314799e-20, 9.0661963254435111e-22, 1.0139748403694180e-23, 4.5910350044246719e-26, 5.8067249027975906e-29, 8.1027566464753963e-33], [-2.6517100945659381e-16, -1.8833266952620615e-16, -9.4608512932691716e-17, -3.3329407366629272e-17, -8.1230987619595370e-18, -1.3429916927382338e-18, -1.4653890021916409e-19, -1.0158425797439672e-20, -4.2414648714382472e-22, -9.8758415087989366e-24, -1.1409340069023656e-25, -5.3962362372499427e-28, -7.2665408281113945e-31, -1.1249127904535353e-34], [2.6002780561635360e-18, 1.8705774109689390e-18, 9.6388383089189263e-19, 3.5263852590250676e-19, 9.0330505811144911e-20, 1.5879388719442095e-20, 1.8632255867155767e-21, 1.4045672664461159e-22, 6.4502660440857290e-24, 1.6720636619143887e-25, 2.1805561592333244e-27, 1.1845633459952975e-29, 1.8784789756394280e-32, 3.5867349947562600e-36], [-2.3227697732256067e-20, -1.8279390628030056e-20, -1.0997202222073632e-20, -4.8548087275368679e-21, -1.5123150789073945e-21, -3.2101981325589103e-22, -4.4846438943426731e-23, -3.9594109725964193e-24, -2.0951838103695886e-25, -6.1659109322399068e-27, -9.0126278491245795e-29, -5.4318098110409437e-31, -9.4931032477985958e-34, -1.9988247039253017e-37], [6.8788871531330986e-23, 1.5514680467631973e-22, 1.8618269825607798e-22, 1.2411690936949595e-22, 4.9905932911543493e-23, 1.2495268182890288e-23, 1.9512482813410415e-24, 1.8627687073272271e-25, 1.0434696584341960e-26, 3.2059411682879012e-28, 4.8477199809575991e-30, 3.0049564012526355e-32, 5.3858125232311841e-35, 1.1646069593857827e-38], [7.7255112711947686e-24, -7.0823143209837219e-26, -5.6973908764650150e-24, -5.0701797558074138e-24, -2.2652941904193196e-24, -5.9709666617074925e-25, -9.6025665370672064e-26, -9.3412966052067663e-27, -5.3022729349502854e-28, -1.6456376673580732e-29, -2.5097725803139440e-31, -1.5684902613679278e-33, -2.8371032034851426e-36, -6.2173844696583654e-40], [-4.5943935286561917e-25, -6.7375750620012003e-26, 2.3003805224207566e-25, 2.2389528041563138e-25, 1.0263219396051406e-25, 2.7372352079728918e-26, 4.4324107117365320e-27, 4.3325892158924037e-28, 2.4689452957277978e-29, 7.6913259276718840e-31, 1.1777447101230491e-32, 7.3969001542992758e-35, 1.3473924597066430e-37, 2.9898285342973877e-41], [2.0000300439709649e-26, 3.4292980928117094e-27, -9.2646325116489139e-27, -9.2161985650886257e-27, -4.2510767725359084e-27, -1.1374757405439088e-27, -1.8463175719264638e-28, -1.8087043492664149e-29, -1.0331225993565858e-30, -3.2273810338165975e-32, -4.9596164104290164e-34, -3.1302717699073434e-36, -5.7451166869068329e-39, -1.2929483156845089e-42]],
        [[4.0268302119914041e-2, 2.8545240339104650e-2, 1.4284128135955920e-2, 5.0021498296180098e-3, 1.2090877512011783e-3, 1.9773576274233735e-4, 2.1277302812546709e-5, 1.4492279507775587e-6, 5.9176526747011481e-8, 1.3392461528922177e-9, 1.4909532829721325e-11, 6.7073677652842309e-14, 8.4010220365415321e-17, 1.1518046241700795e-20], [-4.1094918530842855e-4, -2.9131209026244884e-4, -1.4577348712043883e-4, -5.1048325584755371e-5, -1.2339075655094772e-5, -2.0179482703978971e-6, -2.1714077320210341e-7, -1.4789772960017675e-8, -6.0391285908901033e-10, -1.3667378228604424e-11, -1.5215591546427907e-13, -6.8450547347310142e-16, -8.5734758697005419e-19, -1.1754485482902531e-22], [3.1453604616831635e-6, 2.2296711217451074e-6, 1.1157344497682782e-6, 3.9071834415673248e-7, 9.4441946121548537e-8, 1.5445157115002362e-8, 1.6619719219669091e-9, 1.1319931810429398e-10, 4.6222835378858502e-12, 1.0460863140482714e-13, 1.1645848900589722e-15, 5.2391307671744806e-18, 6.5620456663659800e-21, 8.9967561969832484e-25], [-2.6749105701028657e-8, -1.8961804114996647e-8, -9.4885466228086738e-9, -3.3227882404639778e-9, -8.0316320589167721e-10, -1.3135034729126209e-10, -1.4133919082819288e-11, -9.6268179444683114e-13, -3.9309323373165105e-14, -8.8962413319045161e-16, -9.9039913340131200e-18, -4.4555203247766414e-20, -5.5805701687374159e-23, -7.6511287731869614e-27], [2.3885644363307611e-10, 1.6931966750996309e-10, 8.4728118369831614e-11, 2.9670899177860912e-11, 7.1718648013486068e-12, 1.1728969057792313e-12, 1.2620938077636437e-13, 8.5963151880733261e-15, 3.5101512206140030e-16, 7.9439719602842287e-18, 8.8438746350997473e-20, 3.9786193290780394e-22, 4.9832763794656606e-25, 6.8322888299156661e-29], [-2.1938046607096477e-12, -1.5551388958044371e-12, -7.7819947501068090e-13, -2.7251884779872520e-13, -6.5872077319521539e-14, -1.0772925170980044e-14, -1.1592344921360225e-15, -7.8958606695558777e-17, -3.2242043583223961e-18, -7.2970424298115598e-20, -8.1239694630324149e-22, -3.6549468134217646e-24, -4.5782356293825158e-27, -6.2778452920918165e-31], [2.0521873757045335e-14, 1.4547792267766542e-14, 7.2800918227697946e-15, 2.5495898027823982e-15, 6.1633082576842399e-16, 1.0080857738618460e-16, 1.0849292380530664e-17, 7.3911905718375805e-19, 3.0188826114689116e-20, 6.8345789995429561e-22, 7.6123956038981123e-24, 3.4268587054559844e-26, 4.2964359326458323e-29, 5.9010111807011090e-33], [-1.9441956735555063e-16, -1.3784905661353097e-16, -6.9010317028267091e-17, -2.4183039608126334e-17, -5.8508776596155934e-18, -9.5805333110439565e-19, -1.0325707566048665e-19, -7.0474756109910051e-21, -2.8853024859524786e-22, -6.5522121074225410e-24, -7.3277136128248585e-26, -3.3174548344950086e-28, -4.1948610456644004e-31, -5.8494289132210944e-35], [1.8561980105742778e-18, 1.3181582381916485e-18, 6.6199894597909670e-19, 2.3311870025016365e-19, 5.6783721502743244e-20, 9.3809642743658290e-21, 1.0225927916989026e-21, 7.0799785261423640e-23, 2.9513544869246824e-24, 6.8575146885938824e-26, 7.9000567710820057e-28, 3.7217247100110122e-30, 4.9815372276571921e-33, 7.6275372840274123e-37], [-1.7626905437320612e-20, -1.2657826506376417e-20, -6.4996907836254673e-21, -2.3658978230118579e-21, -6.0212614024250449e-22, -1.0503791384678513e-22, -1.2217762804612719e-23, -9.1223568190559278e-25, -4.1461985545891547e-26, -1.0629406190604153e-27, -1.3696957282241351e-29, -7.3426149677053552e-32, -1.1462827572223925e-34, -2.1418417243242744e-38], [1.5503081293539875e-22, 1.1989422801502202e-22, 7.0187837714212362e-23, 3.0104451172384224e-23, 9.1400287973558371e-24, 1.8994560633885200e-24, 2.6086414246561056e-25, 2.2715578728430179e-26, 1.1883435056785673e-27, 3.4625996284165418e-29, 5.0148645319600036e-31, 2.9942255911366042e-33, 5.1759467457415658e-36, 1.0721835170803536e-39], [-6.5798164042868017e-25, -1.0161299852517523e-24, -1.0690980225592134e-24, -6.7845109123986673e-25, -2.6660294729467856e-25, -6.5906404959506817e-26, -1.0208402400405662e-26, -9.6878260298292384e-28, -5.4002131859713705e-29, -1.6514870709099674e-30, -2.4849081445247519e-32, -1.5311274952100103e-34, -2.7213626967832764e-37, -5.7985875681104218e-41], [-3.4673366839254290e-26, 2.6092701384335281e-27, 2.9040984496787539e-26, 2.5220471263894193e-26, 1.1179020963171705e-26, 2.9342989901526321e-27, 4.7048951183716844e-28, 4.5647737241559265e-29, 2.5839271878370961e-30, 7.9941303588969928e-32, 1.2143086626315323e-33, 7.5473270864869643e-36, 1.3537932252526869e-38, 2.9207693562522368e-42], [2.1188663046217588e-27, 2.9225887858250593e-28, -1.0922941393939922e-27, -1.0543654253349283e-27, -4.8194074737043345e-28, -1.2829131106662887e-28, -2.0736776600709027e-29, -2.0228420513566786e-30, -1.1499299683650274e-31, -3.5712047350438965e-33, -5.4458705049142371e-35, -3.4002615176860538e-37, -6.1371512770800945e-40, -1.3381806216889303e-43]],
        [[3.9470593933398882e-2, 2.7979764003976170e-2, 1.4001161997541231e-2, 4.9030580959399000e-3, 1.1851359293809549e-3, 1.9381865105870006e-4, 2.0855803078309022e-5, 1.4205189926214628e-6, 5.8004249860305528e-8, 1.3127159153635649e-9, 1.4614177531082662e-11, 6.5744959555375443e-14, 8.2345992249530221e-17, 1.1289875712969058e-20], [-3.8700845918115528e-4, -2.7434107968347018e-4, -1.3728113999412605e-4, -4.8074395895661872e-5, -1.1620236339139863e-5, -1.9003883659304255e-6, -2.0449077173844326e-7, -1.3928163014433530e-8, -5.6873062013629096e-10, -1.2871155793086276e-11, -1.4329174621162524e-13, -6.4462813862718443e-16, -8.0740096377363397e-19, -1.1069702705408849e-22], [2.8459354030663870e-6, 2.0174158282098097e-6, 1.0095212320017382e-6, 3.5352360402618579e-7, 8.5451470665234184e-8, 1.3974843194591744e-8, 1.5037591902078099e-9, 1.0242321920822043e-10, 4.1822615754133109e-12, 9.4650329024246500e-14, 1.0537212935038596e-15, 4.7403874571874272e-18, 5.9373663287961921e-21, 8.1403024220303282e-25], [-2.3253388045305269e-8, -1.6483772990061927e-8, -8.2485319106433999e-9, -2.8885481966017779e-9, -6.9820144760288282e-10, -1.1418476129351649e-10, -1.2286820145399601e-11, -8.3687314298152994e-13, -3.4172157837610014e-14, -7.7336291683153667e-16, -8.6096793408212368e-18, -3.8732458810517449e-20, -4.8512659391762224e-23, -6.6512273728123830e-27], [1.9949700725802017e-10, 1.4141867881405274e-10, 7.0766353750482483e-11, 2.4781625705528181e-11, 5.9900567960207695e-12, 9.7962164104063123e-13, 1.0541192835201499e-13, 7.1797600785418361e-15, 2.9317218332745680e-16, 6.6348907160323542e-18, 7.3864796074503707e-20, 3.3229646852230244e-22, 4.1620369914297731e-25, 5.7062787810497439e-29], [-1.7604379689695119e-12, -1.2479327639474169e-12, -6.2446970235861308e-13, -2.1868276956078720e-13, -5.2858643871349642e-14, -8.6445790312790801e-15, -9.3019875580892942e-16, -6.3357289313588250e-17, -2.5870823903745181e-18, -5.8549388023307180e-20, -6.5181976759649715e-22, -2.9323630010667449e-24, -3.6728304716043903e-27, -5.0356212381539677e-31], [1.5822418483194861e-14, 1.1216159359562516e-14, 5.6126256112469503e-15, 1.9654948887264971e-15, 4.7509127771658834e-16, 7.7697986214261696e-17, 8.3608022057458830e-18, 5.6947780052329844e-19, 2.3254163089589408e-20, 5.2629114067725255e-22, 5.8593409775765830e-24, 2.6361081313752999e-26, 3.3020413470468691e-29, 4.5279124332864609e-33], [-1.4405174036241714e-16, -1.0211708136936050e-16, -5.1101983311843007e-17, -1.7896601640395764e-17, -4.3262660272188628e-18, -7.0761255724143709e-19, -7.6154872465928116e-20, -5.1880990473118822e-21, -2.1190280423403789e-22, -4.7973057554890468e-24, -5.3431790369385051e-26, -2.4052651950346659e-28, -3.0154653115042284e-31, -4.1411953894186010e-35], [1.3238282977089996e-18, 9.3861270628278429e-19, 4.6987048413189184e-19, 1.6464415498075180e-19, 3.9830541091204708e-20, 6.5212539164132716e-21, 7.0273402156663794e-22, 4.7952745317589930e-23, 1.9626913672990600e-24, 4.4554346044493667e-26, 4.9802710438471614e-28, 2.2530683180048700e-30, 2.8456782537785777e-33, 3.9592316505663132e-37], [-1.2237379904598936e-20, -8.6878876669418642e-21, -4.3607921082409316e-21, -1.5343274595425077e-21, -3.7329906039233865e-22, -6.1576311901603610e-23, -6.6991030918858790e-24, -4.6266825507085953e-25, -1.9226568154951727e-26, -4.4495894040939828e-28, -5.0996502770950655e-30, -2.3857846530369969e-32, -3.1614547312603775e-35, -4.7598004612600842e-39], [1.1264046027014124e-22, 8.0685430632868224e-23, 4.1228399854044197e-23, 1.4899753659440776e-23, 3.7570346787731053e-24, 6.4814310852699506e-25, 7.4434848411284492e-26, 5.4794367413344983e-27, 2.4523234240752900e-28, 6.1833116408887878e-30, 7.8265420329189011e-32, 4.1144643089730850e-34, 6.2817385688487581e-37, 1.1406438590948558e-40], [-9.7857214851255740e-25, -7.4170950562459410e-25, -4.2009577451263582e-25, -1.7362722168560284e-25, -5.0900766555996315e-26, -1.0261765462012476e-26, -1.3741016427305042e-27, -1.1718360382950224e-28, -6.0248714374882456e-30, -1.7297310454598709e-31, -2.4723519074499660e-33, -1.4577226953896565e-35, -2.4862785182322899e-38, -5.0594292690758757e-42], [5.3678603767838906e-27, 6.2882215775448693e-27, 5.6832779576553848e-27, 3.3649037997225745e-27, 1.2767828206267343e-27, 3.0940812917930763e-28, 4.7324088159907758e-29, 4.4513279385089962e-30, 2.4642410667490436e-31, 7.4912315412225526e-33, 1.1206257905134703e-34, 6.8603816372568278e-37, 1.2091618276148586e-39, 2.5411595474284352e-43], [1.2124510377209373e-28, -2.9476632931695843e-29, -1.3393731226502465e-28, -1.1159388363478041e-28, -4.8788757882614251e-29, -1.2711687898654153e-29, -2.0301640243059650e-30, -1.9623850469059942e-31, -1.1070483374736650e-32, -3.4134130905000887e-34, -5.1633654956651949e-36, -3.1920624532879633e-38, -5.6836790828948895e-41, -1.2090591752690819e-44]],
        [[3.8718497489457671e-2, 2.7446620746866407e-2, 1.3734375433164459e-2, 4.8096322770981438e-3, 1.1625536363559167e-3, 1.9012551387213567e-4, 2.0458404058743271e-5, 1.3934515690931643e-6, 5.6899001985712445e-8, 1.2877026365279819e-9, 1.4335710199909986e-11, 6.4492215541105392e-14, 8.0776922170421162e-17, 1.1074751628670606e-20], [-3.6530542369090864e-4, -2.5895631470585955e-4, -1.2958255516265147e-4, -4.5378433325351649e-5, -1.0968585462495812e-5, -1.7938165451399281e-6, -1.9302314003169945e-7, -1.3147085988537403e-8, -5.3683679315473020e-10, -1.2149354642538157e-11, -1.3525609277393297e-13, -6.0847805701920512e-16, -7.6212274988417210e-19, -1.0448925186499401e-22], [2.5849478535125987e-6, 1.8324079699944283e-6, 9.1694271724052344e-7, 3.2110359226538165e-7, 7.7615112202027133e-8, 1.2693275071620796e-8, 1.3658564016897485e-9, 9.3030460276951050e-11, 3.7987257408359506e-12, 8.5970385794445879e-14, 9.5708939439835838e-16, 4.3056684780423976e-18, 5.3928779565801349e-21, 7.3937929713023523e-25], [-2.0323763743911516e-8, -1.4407032085982970e-8, -7.2093242147544152e-9, -2.5246287035536586e-9, -6.1023714729308285e-10, -9.9798966355464284e-11, -1.0738840555371131e-11, -7.3143800391632328e-13, -2.9866909895722160e-14, -6.7592923074629218e-16, -7.5249714498787742e-18, -3.3852671020607998e-20, -4.2400692144654286e-23, -5.8132585781482443e-27], [1.6778203806708541e-10, 1.1893669097676592e-10, 5.9516294724269256e-11, 2.0841973797541017e-11, 5.0377889874629412e-12, 8.2388648133701741e-13, 8.8654080659699053e-14, 6.0383580487560592e-15, 2.4656511772709554e-16, 5.5801076527451038e-18, 6.2122112145757728e-20, 2.7946942888821760e-22, 3.5003730153222526e-25, 4.7991137848965207e-29], [-1.4246923143701607e-12, -1.0099304652318120e-12, -5.0537239884210654e-13, -1.7697604964453687e-13, -4.2777524515332489e-14, -6.9958918300868112e-15, -7.5279111011752754e-16, -5.1273700963416319e-17, -2.0936665234784188e-18, -4.7382561902128215e-20, -5.2749978863802077e-22, -2.3730699624974658e-24, -2.9722873581399336e-27, -4.0750966391526504e-31], [1.2321552854563686e-14, 8.7344569745914730e-15, 4.3707514048291364e-15, 1.5305915637332035e-15, 3.6996512677326256e-16, 6.0504635725047801e-17, 6.5105936850049414e-18, 4.4344674577377828e-19, 1.8107362681691037e-20, 4.0979567464274496e-22, 4.5621821761378718e-24, 2.0524043945018151e-26, 2.5706693888567051e-29, 3.5245086281432650e-33], [-1.0794751716286817e-16, -7.6521579307450917e-17, -3.8291797249326268e-17, -1.3409465773563430e-17, -3.2412792225234997e-18, -5.3008915854094917e-19, -5.7040957221656094e-20, -3.8852167567666139e-21, -1.5864947244218654e-22, -3.5905687510686858e-24, -3.9974673572065725e-26, -1.7984477503144907e-28, -2.2527580050149580e-31, -3.0890491024081675e-35], [9.5478786181044855e-19, 6.7683941076093021e-19, 3.3870584154338986e-19, 1.1861835963134221e-19, 2.8674083463006866e-20, 4.6899171260238427e-21, 5.0472942566083803e-22, 3.4384121289512811e-23, 1.4043383344092349e-24, 3.1791655234471989e-26, 3.5407006213786386e-28, 1.5937304686713117e-30, 1.9977791961214352e-33, 2.7428871168477223e-37], [-8.5061836630704833e-21, -6.0307956750706685e-21, -3.0188113403225879e-21, -1.0576868487485807e-21, -2.5583584996134076e-22, -4.1878317468639844e-23, -4.5116583446510882e-24, -3.0776099181873875e-25, -1.2591136329025881e-26, -2.8566568579293870e-28, -3.1907412128823314e-30, -1.4419444044384369e-32, -1.8182260827340720e-35, -2.5221342775178381e-39], [7.6138012306090548e-23, 5.4036078848052976e-23, 2.7104647462647769e-23, 9.5268307255372238e-24, 2.3145570255323679e-24, 3.8107642261393018e-25, 4.1359739215796523e-26, 2.8478888416035083e-27, 1.1789870854991134e-28, 2.7154303336485938e-30, 3.0928433674956417e-32, 1.4349276277916818e-34, 1.8789391093616657e-37, 2.7738946723049432e-41], [-6.7966010157622873e-25, -4.8557608959262804e-25, -2.4683256283098590e-25, -8.8521452442199273e-26, -2.2097680849765545e-26, -3.7655698632273079e-27, -4.2626918359242285e-28, -3.0870114609042769e-29, -1.3566254289845612e-30, -3.3525124074616300e-32, -4.1506352616842593e-34, -2.1290379379141523e-36, -3.1599768823132190e-39, -5.5362287080329950e-43], [5.8283579302066563e-27, 4.3357063163115914e-27, 2.3770069490534559e-27, 9.4447780557773533e-28, 2.6604069901043393e-28, 5.1681724765363238e-29, 6.6987007493553842e-30, 5.5539778582405284e-31, 2.7874746074140220e-32, 7.8399595728092465e-34, 1.1000370594362443e-35, 6.3761866708868234e-38, 1.0689495047584767e-40, 2.1306962591678013e-44], [-3.9485305666687430e-29, -4.0161472156876869e-29, -3.0170407924233965e-29, -1.6023737137301802e-29, -5.7157198623825989e-30, -1.3360451157063453e-30, -2.0013163450675362e-31, -1.8438199847046550e-32, -1.0081711263709550e-33, -3.0349165041176424e-35, -4.5124682972888382e-37, -2.7387681839706285e-39, -4.7698448102536367e-42, -9.9089009756074025e-46]],
    ],
]

